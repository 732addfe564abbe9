"""Dictionary ingestion: ``label<TAB>key`` lines into a trie.

Each entry is inserted once per enabled match type:

- Exact: the key as written,
- Fuzzy: every folded spelling of the key (``-i``),
- WholeWord: the key wrapped in boundary sentinels (``-w``),
- FuzzyWholeWord: the folded spellings wrapped in sentinels (both).
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .normalize import fuzzy_keys, wrap
from .records import DictionaryWarning, MatchType, Value
from .trie import Trie


class DictionaryError(Exception):
    """The dictionary file could not be read."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"cannot read dictionary {path}: {reason}")


class Dictionary:
    """Parsed dictionary entries plus the lines that were skipped."""

    __slots__ = ("entries", "warnings")

    def __init__(self, entries=None, warnings=None):
        self.entries: list[tuple[str, str]] = entries if entries is not None else []
        self.warnings: list[DictionaryWarning] = warnings if warnings is not None else []

    def __len__(self):
        return len(self.entries)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self.entries)


def parse_dictionary(lines: Iterable[str]) -> Dictionary:
    """Split ``label<TAB>key`` lines, skipping malformed ones.

    Only the first tab separates label from key, so keys may contain tabs.
    """
    dictionary = Dictionary()
    for number, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n")
        if not line:
            continue
        label, sep, key = line.partition("\t")
        if not sep:
            dictionary.warnings.append(
                DictionaryWarning("missing-separator", number, f"no tab in {line!r}")
            )
            continue
        if not key:
            dictionary.warnings.append(
                DictionaryWarning("empty-key", number, f"empty key for label {label!r}")
            )
            continue
        dictionary.entries.append((label, key))
    return dictionary


def load_dictionary(path) -> Dictionary:
    """Read and parse a UTF-8 dictionary file.

    Raises:
        DictionaryError: if the file can't be opened or decoded
    """
    try:
        with open(path, encoding="utf-8") as handle:
            return parse_dictionary(handle)
    except (OSError, UnicodeDecodeError) as exc:
        raise DictionaryError(path, exc) from exc


def entry_paths(label, key, fuzzy=False, whole_word=False) -> Iterator[tuple[str, Value]]:
    """Yield the (path, value) pairs inserted for one dictionary entry.

    Folded spellings come before the literal key, so when a key is already
    in folded form its literal path keeps the Exact/WholeWord type.
    """
    folded = list(fuzzy_keys(key)) if fuzzy else []
    for spelling in folded:
        yield spelling, Value(MatchType.FUZZY, label)
    yield key, Value(MatchType.EXACT, label)
    if whole_word:
        for spelling in folded:
            yield wrap(spelling), Value(MatchType.FUZZY_WHOLE_WORD, label)
        yield wrap(key), Value(MatchType.WHOLE_WORD, label)


def build_trie(entries: Iterable[tuple[str, str]], fuzzy=False, whole_word=False) -> Trie:
    """Build the lookup trie for ``(label, key)`` entries.

    Later entries win when two of them produce an identical path.
    """
    return Trie(
        item
        for label, key in entries
        if key
        for item in entry_paths(label, key, fuzzy, whole_word)
    )
