class SmallCharSet:
    """Constant-time membership test for a fixed set of ASCII symbols."""

    __slots__ = ("_chars", "_mask")

    def __init__(self, chars):
        mask = 0
        for c in chars:
            code = ord(c)
            if code >= 128:
                raise ValueError("SmallCharSet only supports ASCII")
            mask |= 1 << code
        self._mask = mask
        self._chars = "".join(sorted(set(chars)))

    def contains(self, c):
        if len(c) != 1:
            return False
        code = ord(c)
        if code >= 128:
            return False
        return (self._mask >> code) & 1 == 1

    __contains__ = contains

    def __iter__(self):
        return iter(self._chars)

    def __len__(self):
        return len(self._chars)

    def __repr__(self):
        return f"SmallCharSet({self._chars!r})"
