"""Read-only traversal handles into a :class:`~nametagger.trie.Trie`."""


class Cursor:
    """A position in a trie plus the symbols consumed to reach it.

    Cursors never mutate the trie or themselves: ``advance`` returns a new
    cursor, so a candidate can branch by keeping the old one around.
    """

    __slots__ = ("node", "path", "trie")

    def __init__(self, trie, node=0, path=""):
        self.trie = trie
        self.node = node
        self.path = path

    def advance(self, symbol):
        """Follow the edge for ``symbol``; None when there is no such edge."""
        child = self.trie.child(self.node, symbol)
        if child is None:
            return None
        return Cursor(self.trie, child, self.path + symbol)

    @property
    def is_terminal(self):
        return self.trie.value(self.node) is not None

    @property
    def value(self):
        return self.trie.value(self.node)

    @property
    def depth(self):
        return len(self.path)

    def __repr__(self):
        return f"Cursor(node={self.node}, path={self.path!r})"
