"""Tests for dictionary parsing, loading and trie construction."""

import os
import tempfile
import unittest

from nametagger import DictionaryError, DictionaryWarning, MatchType, Value, build_trie, load_dictionary, parse_dictionary
from nametagger.dictionary import entry_paths


class TestParseDictionary(unittest.TestCase):
    def test_splits_on_first_tab(self):
        dictionary = parse_dictionary(["John Smith\tjohn\n", "Tabbed\ta\tb\n"])
        assert dictionary.entries == [("John Smith", "john"), ("Tabbed", "a\tb")]
        assert dictionary.warnings == []

    def test_skips_lines_without_separator(self):
        dictionary = parse_dictionary(["no separator here\n", "Ok\tok\n"])
        assert dictionary.entries == [("Ok", "ok")]
        assert dictionary.warnings == [DictionaryWarning("missing-separator", 1)]

    def test_skips_empty_keys(self):
        dictionary = parse_dictionary(["Label\t\n", "Ok\tok"])
        assert dictionary.entries == [("Ok", "ok")]
        assert dictionary.warnings[0].code == "empty-key"
        assert dictionary.warnings[0].line == 1

    def test_blank_lines_are_ignored_silently(self):
        dictionary = parse_dictionary(["\n", "A\ta\r\n", ""])
        assert list(dictionary) == [("A", "a")]
        assert len(dictionary) == 1
        assert dictionary.warnings == []


class TestDictionaryWarning(unittest.TestCase):
    def test_str_with_line(self):
        warning = DictionaryWarning("empty-key", line=3)
        assert str(warning) == "(3): empty-key"

    def test_str_with_message(self):
        warning = DictionaryWarning("empty-key", line=3, message="empty key for label 'X'")
        assert str(warning) == "(3): empty-key - empty key for label 'X'"

    def test_repr(self):
        assert repr(DictionaryWarning("empty-key", line=3)) == "DictionaryWarning('empty-key', line=3)"
        assert repr(DictionaryWarning("empty-key")) == "DictionaryWarning('empty-key')"

    def test_equality(self):
        assert DictionaryWarning("a", 1) == DictionaryWarning("a", 1, "different message")
        assert DictionaryWarning("a", 1) != DictionaryWarning("b", 1)
        assert DictionaryWarning("a", 1).__eq__("a") is NotImplemented


class TestLoadDictionary(unittest.TestCase):
    def test_reads_utf8_file(self):
        with tempfile.NamedTemporaryFile("w", encoding="utf-8", suffix=".tsv", delete=False) as handle:
            handle.write("Zoë\tzoë\nbroken line\n")
            path = handle.name
        try:
            dictionary = load_dictionary(path)
        finally:
            os.unlink(path)
        assert dictionary.entries == [("Zoë", "zoë")]
        assert len(dictionary.warnings) == 1

    def test_missing_file_raises_dictionary_error(self):
        with self.assertRaises(DictionaryError) as ctx:
            load_dictionary("/nonexistent/dictionary.tsv")
        assert ctx.exception.path == "/nonexistent/dictionary.tsv"
        assert "cannot read dictionary" in str(ctx.exception)
        assert isinstance(ctx.exception.__cause__, OSError)


class TestBuildTrie(unittest.TestCase):
    def test_exact_only_by_default(self):
        trie = build_trie([("John Smith", "John")])
        assert dict(trie.items()) == {"John": Value(MatchType.EXACT, "John Smith")}

    def test_fuzzy_adds_folded_path(self):
        trie = build_trie([("AT&T", "AT-T")], fuzzy=True)
        assert trie["AT-T"] == Value(MatchType.EXACT, "AT&T")
        assert trie["at.t"] == Value(MatchType.FUZZY, "AT&T")

    def test_whole_word_adds_wrapped_paths(self):
        trie = build_trie([("Cat", "Cat")], fuzzy=True, whole_word=True)
        assert dict(trie.items()) == {
            "Cat": Value(MatchType.EXACT, "Cat"),
            "cat": Value(MatchType.FUZZY, "Cat"),
            " Cat ": Value(MatchType.WHOLE_WORD, "Cat"),
            " cat ": Value(MatchType.FUZZY_WHOLE_WORD, "Cat"),
        }

    def test_literal_path_keeps_exact_type_when_already_folded(self):
        trie = build_trie([("John", "john")], fuzzy=True, whole_word=True)
        assert trie["john"].match_type is MatchType.EXACT
        assert trie[" john "].match_type is MatchType.WHOLE_WORD
        assert len(trie) == 2

    def test_later_entry_wins_on_identical_path(self):
        trie = build_trie([("First", "same"), ("Second", "same")])
        assert trie["same"].label == "Second"

    def test_empty_keys_are_not_inserted(self):
        trie = build_trie([("Empty", "")])
        assert len(trie) == 0
        assert not trie.cursor().is_terminal

    def test_entry_paths_inserts_every_variant_of_unusual_case(self):
        paths = [path for path, _ in entry_paths("Long S", "ſun", fuzzy=True)]
        assert paths == ["ſun", "sun", "ſun"]


if __name__ == "__main__":
    unittest.main()
