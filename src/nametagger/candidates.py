"""Partial matches advanced in parallel by the matching engine.

A candidate owns a cursor, the offset where it started and whether it has
so far matched using only literal input symbols. Its ``kind`` selects one
of a closed set of stepping rules:

STRICT
    Only the literal symbol may extend the cursor.
FUZZY_CASE
    Both the literal symbol and its folded form (lowercase, punctuation
    placeholder) extend the cursor, splitting the candidate in two when
    both edges exist.
SKIP_SPACE
    As FUZZY_CASE, and an input whitespace symbol that extends nothing
    may be passed over.
SKIP_SYMBOL
    As SKIP_SPACE, and punctuation may be passed over too.

Any substitution or skip clears ``strict``. Nothing is skipped until the
candidate has consumed a non-whitespace symbol, so skipping never moves
where a match (or the name inside a whole-word match) starts.
"""

from .normalize import fold, is_skippable


class Candidate:
    STRICT = 0
    FUZZY_CASE = 1
    SKIP_SPACE = 2
    SKIP_SYMBOL = 3

    KIND_NAMES = ("strict", "fuzzy-case", "skip-space", "skip-symbol")

    __slots__ = ("cursor", "kind", "skipped", "start", "strict")

    def __init__(self, kind, cursor, start, strict=True, skipped=False):
        self.kind = kind
        self.cursor = cursor
        self.start = start
        self.strict = strict
        # True when the last step passed over the symbol instead of consuming it
        self.skipped = skipped

    @classmethod
    def kind_for(cls, fuzzy, skip=None):
        """Pick the candidate kind for a tagger configuration."""
        if not fuzzy:
            return cls.STRICT
        if skip == "symbol":
            return cls.SKIP_SYMBOL
        if skip == "space":
            return cls.SKIP_SPACE
        return cls.FUZZY_CASE

    def step(self, symbol):
        """Consume ``symbol`` and return the list of successor candidates.

        An empty list means this candidate is dead.
        """
        kind = self.kind
        successors = []
        nxt = self.cursor.advance(symbol)
        if nxt is not None:
            successors.append(Candidate(kind, nxt, self.start, self.strict))
        if kind == self.STRICT:
            return successors

        # The literal and folded edges lead to disjoint subtrees, so
        # following both never reports the same path twice.
        folded = fold(symbol)
        if folded != symbol:
            nxt = self.cursor.advance(folded)
            if nxt is not None:
                successors.append(Candidate(kind, nxt, self.start, False))
        if successors:
            return successors

        if kind == self.SKIP_SPACE:
            skip = "space"
        elif kind == self.SKIP_SYMBOL:
            skip = "symbol"
        else:
            return successors
        if self.cursor.path.strip() and is_skippable(symbol, skip):
            successors.append(Candidate(kind, self.cursor, self.start, False, skipped=True))
        return successors

    def __repr__(self):
        name = self.KIND_NAMES[self.kind]
        return f"<{name} start={self.start} path={self.cursor.path!r} strict={self.strict}>"
