"""Record types shared by the index, the matching engine and the output layer."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class MatchType(enum.Enum):
    """Which normalization variant of a dictionary entry produced a trie path."""

    EXACT = "Exact"
    FUZZY = "Fuzzy"
    WHOLE_WORD = "WholeWord"
    FUZZY_WHOLE_WORD = "FuzzyWholeWord"

    @property
    def is_fuzzy(self) -> bool:
        return self in (MatchType.FUZZY, MatchType.FUZZY_WHOLE_WORD)

    @property
    def is_whole_word(self) -> bool:
        return self in (MatchType.WHOLE_WORD, MatchType.FUZZY_WHOLE_WORD)


@dataclass(frozen=True, slots=True)
class Value:
    """Terminal payload of a trie path: the variant and the entry's label."""

    match_type: MatchType
    label: str


@dataclass(frozen=True, slots=True)
class Match:
    """A dictionary hit inside one scanned line.

    ``start``/``end`` are symbol offsets into the caller's line (end is
    exclusive). ``text`` is the dictionary path that matched, which may
    differ from the line's own symbols when case folding, punctuation
    folding or skipping was involved; ``strict`` is False in that case.
    """

    start: int
    end: int
    text: str
    strict: bool
    value: Value

    @property
    def match_type(self) -> MatchType:
        return self.value.match_type

    @property
    def label(self) -> str:
        return self.value.label


class DictionaryWarning:
    """A dictionary line that was skipped during ingestion."""

    __slots__ = ("code", "line", "message")

    def __init__(self, code, line=None, message=None):
        self.code = code
        self.line = line
        self.message = message or code

    def __repr__(self):
        if self.line is not None:
            return f"DictionaryWarning({self.code!r}, line={self.line})"
        return f"DictionaryWarning({self.code!r})"

    def __str__(self):
        if self.line is not None:
            if self.message != self.code:
                return f"({self.line}): {self.code} - {self.message}"
            return f"({self.line}): {self.code}"
        if self.message != self.code:
            return f"{self.code} - {self.message}"
        return self.code

    def __eq__(self, other):
        if not isinstance(other, DictionaryWarning):
            return NotImplemented
        return self.code == other.code and self.line == other.line

    __hash__ = None  # Unhashable since we define __eq__
