"""Trie data structure for dictionary lookup during streaming matching.

Nodes live in an arena: two parallel lists addressed by integer node ids.
``_children[node]`` maps a symbol to the id of the child node, and
``_values[node]`` holds the terminal value (or None). Node 0 is the root
and represents the empty sequence.

The trie is append-only while the dictionary is loaded and read-only
while lines are scanned, so cursors can hold plain node ids without any
aliasing concerns.
"""

from .cursor import Cursor

ROOT = 0


class Trie:
    """Trie mapping symbol sequences to values.

    Usage:
        trie = Trie()
        trie.insert("john", Value(MatchType.EXACT, "John Smith"))

        cursor = trie.cursor()
        for symbol in "john":
            cursor = cursor.advance(symbol)
        cursor.value  # Value(MatchType.EXACT, "John Smith")

    Inserting a second value at an identical path overwrites the first
    (last write wins).
    """

    __slots__ = ("_children", "_terminal_count", "_values")

    def __init__(self, items=None):
        """Build a trie, optionally from an iterable of (symbols, value) pairs."""
        self._children = [{}]
        self._values = [None]
        self._terminal_count = 0
        if items is not None:
            for symbols, value in items:
                self.insert(symbols, value)

    def insert(self, symbols, value):
        """Insert ``symbols`` and attach ``value`` to its final node.

        Every prefix of ``symbols`` becomes reachable from the root. An
        empty sequence sets the root's value; the dictionary loader never
        does this.
        """
        children = self._children
        node = ROOT
        for symbol in symbols:
            edges = children[node]
            child = edges.get(symbol)
            if child is None:
                child = len(children)
                edges[symbol] = child
                children.append({})
                self._values.append(None)
            node = child
        if self._values[node] is None:
            self._terminal_count += 1
        self._values[node] = value

    def child(self, node, symbol):
        """Return the id of ``node``'s child along ``symbol``, or None."""
        return self._children[node].get(symbol)

    def value(self, node):
        """Return the value attached to ``node`` (None if non-terminal)."""
        return self._values[node]

    def cursor(self):
        """Return a cursor positioned at the root with an empty path."""
        return Cursor(self)

    @property
    def node_count(self):
        return len(self._children)

    def __len__(self):
        return self._terminal_count

    def _find(self, symbols):
        node = ROOT
        children = self._children
        for symbol in symbols:
            node = children[node].get(symbol)
            if node is None:
                return None
        return node

    def __contains__(self, symbols):
        """Check if ``symbols`` is a terminal path."""
        node = self._find(symbols)
        return node is not None and self._values[node] is not None

    def __getitem__(self, symbols):
        """Get the value attached to ``symbols``.

        Raises:
            KeyError: if ``symbols`` is not a terminal path
        """
        node = self._find(symbols)
        if node is None or self._values[node] is None:
            raise KeyError(symbols)
        return self._values[node]

    def items(self):
        """Yield (path, value) for every terminal path, in symbol order."""
        stack = [(ROOT, "")]
        children = self._children
        values = self._values
        while stack:
            node, path = stack.pop()
            if values[node] is not None:
                yield path, values[node]
            edges = children[node]
            for symbol in sorted(edges, reverse=True):
                stack.append((edges[symbol], path + symbol))
