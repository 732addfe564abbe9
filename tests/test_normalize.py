"""Tests for case and punctuation folding."""

import unittest

from nametagger.normalize import (
    MAX_FUZZY_SPELLINGS,
    PLACEHOLDER,
    PUNCTUATION,
    fold,
    fold_text,
    fold_variants,
    fuzzy_keys,
    is_punctuation,
    is_skippable,
    wrap,
)
from nametagger.smallset import SmallCharSet


class TestFold(unittest.TestCase):
    def test_lowercases_letters(self):
        assert fold_text("John SMITH") == "john smith"

    def test_punctuation_maps_to_placeholder(self):
        for symbol in "/|-.\\:,;+()":
            assert fold(symbol) == PLACEHOLDER
        assert fold_text("a-b/c") == "a.b.c"

    def test_other_symbols_unchanged(self):
        for symbol in " &'!?\t0123456789":
            assert fold(symbol) == symbol

    def test_fold_is_idempotent(self):
        symbols = [chr(code) for code in range(0x250)]
        symbols += ["İ", "ſ", "K", "ẞ", "Σ", "ς", "ǅ"]
        for symbol in symbols:
            once = fold(symbol)
            assert len(once) == 1
            assert fold(once) == once, repr(symbol)

    def test_multi_codepoint_lowercase_is_left_alone(self):
        # U+0130 lowercases to "i" plus a combining dot
        assert fold("İ") == "İ"


class TestFoldVariants(unittest.TestCase):
    def test_plain_letter_has_one_variant(self):
        assert fold_variants("A") == ("a",)
        assert fold_variants("a") == ("a",)

    def test_canonical_form_comes_first(self):
        for symbol in "AbZſK":
            assert fold_variants(symbol)[0] == fold(symbol)

    def test_long_s_expands_to_both_forms(self):
        # "ſ" uppercases to "S", so input typed as "s" must also match
        assert fold_variants("ſ") == ("ſ", "s")

    def test_punctuation_has_single_variant(self):
        assert fold_variants("-") == (PLACEHOLDER,)

    def test_fuzzy_keys_cover_every_variant(self):
        assert list(fuzzy_keys("Aſ-b")) == ["aſ.b", "as.b"]

    def test_fuzzy_keys_plain_key(self):
        assert list(fuzzy_keys("O'Brien")) == ["o'brien"]

    def test_fuzzy_keys_expand_up_to_limit(self):
        spellings = list(fuzzy_keys("ſ" * 6))
        assert len(spellings) == 2 ** 6 == MAX_FUZZY_SPELLINGS
        assert spellings[0] == "ſ" * 6
        assert "s" * 6 in spellings

    def test_fuzzy_keys_past_limit_keep_canonical_only(self):
        assert list(fuzzy_keys("Xſ" * 20)) == ["xſ" * 20]


class TestSkippable(unittest.TestCase):
    def test_no_skip_mode(self):
        assert not is_skippable(" ", None)

    def test_space_mode(self):
        assert is_skippable(" ", "space")
        assert is_skippable("\t", "space")
        assert not is_skippable("-", "space")
        assert not is_skippable("a", "space")

    def test_symbol_mode(self):
        assert is_skippable(" ", "symbol")
        assert is_skippable("-", "symbol")
        assert not is_skippable("&", "symbol")
        assert not is_skippable("a", "symbol")


class TestPunctuationSet(unittest.TestCase):
    def test_membership(self):
        assert is_punctuation("|")
        assert not is_punctuation("!")
        assert "(" in PUNCTUATION
        assert len(PUNCTUATION) == 11

    def test_non_ascii_is_never_member(self):
        assert not is_punctuation("–")

    def test_rejects_non_ascii_construction(self):
        with self.assertRaises(ValueError):
            SmallCharSet("aé")

    def test_wrap_adds_sentinels(self):
        assert wrap("cat") == " cat "


if __name__ == "__main__":
    unittest.main()
