from .cursor import Cursor
from .dictionary import Dictionary, DictionaryError, build_trie, load_dictionary, parse_dictionary
from .engine import Tagger, TaggerOpts, find_matches
from .normalize import fold, fold_variants
from .records import DictionaryWarning, Match, MatchType, Value
from .serialize import format_line, format_match
from .trie import Trie

__all__ = [
    "Cursor",
    "Dictionary",
    "DictionaryError",
    "DictionaryWarning",
    "Match",
    "MatchType",
    "Tagger",
    "TaggerOpts",
    "Trie",
    "Value",
    "build_trie",
    "find_matches",
    "fold",
    "fold_variants",
    "format_line",
    "format_match",
    "load_dictionary",
    "parse_dictionary",
]
