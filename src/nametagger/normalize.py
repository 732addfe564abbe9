"""Symbol normalization for case- and punctuation-insensitive matching.

The same rules are applied to dictionary keys when the trie is built and
to input symbols while a line is scanned:

- letters fold to lowercase,
- every symbol in ``PUNCTUATION`` folds to ``PLACEHOLDER``.

Unicode has a few symbols whose case mapping is not one-to-one (``ſ``
uppercases to ``S``, ``İ`` lowercases to two code points). Scanning folds
an input symbol to its single canonical ``fold`` only, so the
dictionary side has to contain every folded variant a key could be typed
as; ``fold_variants`` and ``fuzzy_keys`` provide that expansion.
"""

from itertools import product
from math import prod

from .smallset import SmallCharSet

PUNCTUATION = SmallCharSet("/|-.\\:,;+()")
PLACEHOLDER = "."

# Boundary symbol wrapped around whole-word keys and scanned lines
SENTINEL = " "

# Keys with more folded spellings than this only get their canonical one
MAX_FUZZY_SPELLINGS = 64


def is_punctuation(symbol):
    return PUNCTUATION.contains(symbol)


def fold(symbol):
    """Return the canonical fuzzy form of a single symbol.

    Symbols whose lowercase form is more than one code point are left as
    they are, so the result is always a single symbol and ``fold`` is
    idempotent.
    """
    if PUNCTUATION.contains(symbol):
        return PLACEHOLDER
    lowered = symbol.lower()
    if len(lowered) == 1:
        return lowered
    return symbol


def fold_text(text):
    return "".join(fold(symbol) for symbol in text)


def fold_variants(symbol):
    """Return every canonical form an input equivalent to ``symbol`` folds to.

    The first element is always ``fold(symbol)``.
    """
    if PUNCTUATION.contains(symbol):
        return (PLACEHOLDER,)
    forms = [fold(symbol)]
    for variant in (symbol.upper(), symbol.lower(), symbol.casefold()):
        if len(variant) != 1:
            continue
        folded = fold(variant)
        if folded not in forms:
            forms.append(folded)
    return tuple(forms)


def fuzzy_keys(key):
    """Yield every folded spelling of ``key``, canonical spelling first.

    The spellings are the product of each symbol's variants, so they grow
    exponentially with the number of symbols like ``ſ`` in the key. Past
    ``MAX_FUZZY_SPELLINGS`` only the canonical spelling is yielded, and
    input typed with the other variants of such a key is not matched.
    """
    choices = [fold_variants(symbol) for symbol in key]
    if prod(len(variants) for variants in choices) > MAX_FUZZY_SPELLINGS:
        yield "".join(variants[0] for variants in choices)
        return
    for combination in product(*choices):
        yield "".join(combination)


def is_skippable(symbol, skip):
    """Whether a fuzzy candidate may pass over ``symbol`` without consuming it.

    ``skip`` is None, ``"space"`` or ``"symbol"``; ``"symbol"`` also skips
    whitespace.
    """
    if skip is None:
        return False
    if symbol.isspace():
        return True
    return skip == "symbol" and PUNCTUATION.contains(symbol)


def wrap(text):
    return f"{SENTINEL}{text}{SENTINEL}"
