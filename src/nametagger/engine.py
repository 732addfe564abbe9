"""Streaming multi-pattern matcher.

``find_matches`` is a single left-to-right pass over a symbol sequence.
At every offset a fresh candidate is started at the trie root, every live
candidate is stepped with the current symbol, candidates that cannot
extend are dropped, and every survivor sitting on a terminal node emits a
``Match``. Nothing is ever backtracked, so one pass costs O(n * k) where k
is the number of simultaneously live candidates.

Matches come out ordered by end offset, and for the same end offset in
the order their candidates were started. Overlapping and nested matches
are all reported; disambiguation is left to the consumer.

``Tagger`` owns the trie built from a dictionary and runs the passes a
configuration needs for each line: a raw pass for the substring match
types and, with whole-word matching, a pass over the line wrapped in
boundary sentinels for the whole-word match types.
"""

import sys

from .candidates import Candidate
from .dictionary import build_trie
from .normalize import SENTINEL, wrap
from .records import Match

SKIP_MODES = (None, "space", "symbol")


class TaggerOpts:
    __slots__ = ("debug", "fuzzy", "skip", "whole_word")

    def __init__(self, fuzzy=False, whole_word=False, skip=None, debug=False):
        if skip not in SKIP_MODES:
            raise ValueError(f"unknown skip mode {skip!r}; expected 'space' or 'symbol'")
        if skip is not None and not fuzzy:
            raise ValueError("skipping whitespace or symbols requires fuzzy matching")
        self.fuzzy = bool(fuzzy)
        self.whole_word = bool(whole_word)
        self.skip = skip
        self.debug = bool(debug)

    def __repr__(self):
        return (
            f"TaggerOpts(fuzzy={self.fuzzy}, whole_word={self.whole_word}, "
            f"skip={self.skip!r}, debug={self.debug})"
        )


class ScanStats:
    """Counters collected by ``find_matches`` when asked to."""

    __slots__ = ("peak_live", "symbols")

    def __init__(self):
        self.symbols = 0
        self.peak_live = 0


def find_matches(trie, symbols, kind=Candidate.STRICT, accept=None, stats=None):
    """Return every match of a trie path inside ``symbols``.

    Args:
        trie: the dictionary trie
        symbols: the sequence to scan (usually a str)
        kind: candidate kind started at every offset
        accept: optional predicate on a terminal value; values it rejects
            are not reported
        stats: optional ScanStats updated in place

    Returns:
        list[Match]: offsets are relative to ``symbols``
    """
    live = []
    matches = []
    for offset, symbol in enumerate(symbols):
        live.append(Candidate(kind, trie.cursor(), offset))

        successors = []
        for candidate in live:
            successors.extend(candidate.step(symbol))
        live = successors

        if stats is not None:
            stats.symbols += 1
            if len(live) > stats.peak_live:
                stats.peak_live = len(live)

        for candidate in live:
            if candidate.skipped:
                continue
            value = candidate.cursor.value
            if value is None or (accept is not None and not accept(value)):
                continue
            matches.append(
                Match(candidate.start, offset + 1, candidate.cursor.path, candidate.strict, value)
            )
    return matches


def _is_substring_value(value):
    return not value.match_type.is_whole_word


def _is_whole_word_value(value):
    return value.match_type.is_whole_word


def _unwrap(match):
    # Wrapped offsets are shifted by the leading sentinel, and the path
    # starts and ends with a sentinel that is not part of the name.
    width = len(SENTINEL)
    return Match(
        match.start,
        match.end - 2 * width,
        match.text[width:-width],
        match.strict,
        match.value,
    )


class Tagger:
    """A loaded dictionary, ready to tag lines.

    Usage:
        tagger = Tagger([("John Smith", "john")], TaggerOpts(fuzzy=True))
        for match in tagger.tag("Ask JOHN now"):
            print(match.start, match.end, match.label)

    The trie is built once in the constructor and never modified after, so
    a Tagger can be shared freely between lines.
    """

    __slots__ = ("kind", "opts", "trie")

    def __init__(self, entries, opts=None):
        self.opts = opts or TaggerOpts()
        self.kind = Candidate.kind_for(self.opts.fuzzy, self.opts.skip)
        entries = list(entries)
        self.trie = build_trie(entries, fuzzy=self.opts.fuzzy, whole_word=self.opts.whole_word)
        if self.opts.debug:
            self.debug(
                f"loaded {len(entries)} entries: {len(self.trie)} paths, "
                f"{self.trie.node_count} nodes, candidates={Candidate.KIND_NAMES[self.kind]}"
            )

    def debug(self, message):
        if self.opts.debug:
            print(f"[nametagger] {message}", file=sys.stderr)

    def tag(self, line):
        """Return all matches in one line (without its newline)."""
        stats = ScanStats() if self.opts.debug else None
        matches = find_matches(self.trie, line, self.kind, _is_substring_value, stats)
        if self.opts.whole_word:
            wrapped = find_matches(self.trie, wrap(line), self.kind, _is_whole_word_value, stats)
            matches.extend(_unwrap(match) for match in wrapped)
        if stats is not None:
            self.debug(
                f"{len(line)} symbols, {stats.symbols} scanned, "
                f"peak {stats.peak_live} live candidates, {len(matches)} matches"
            )
        return matches

    def tag_lines(self, lines):
        """Yield ``(line, matches)`` for every line, newline stripped."""
        for line in lines:
            line = line.rstrip("\r\n")
            yield line, self.tag(line)
