from __future__ import annotations

import unittest

from nametagger import Match, MatchType, Value, format_line, format_match


def make_match(start=4, end=11, text="johnson", strict=True, match_type=MatchType.EXACT, label="Johnson Corp"):
    return Match(start, end, text, strict, Value(match_type, label))


class TestFormatMatch(unittest.TestCase):
    def test_fields_are_tab_separated(self) -> None:
        assert format_match(make_match()) == "4\t11\tjohnson\ttrue\tExact\tJohnson Corp"

    def test_strict_false_and_type_name(self) -> None:
        line = format_match(make_match(strict=False, match_type=MatchType.FUZZY_WHOLE_WORD))
        assert line.split("\t")[3:5] == ["false", "FuzzyWholeWord"]

    def test_tabs_in_fields_are_escaped(self) -> None:
        line = format_match(make_match(text="a\tb", label="x\ny"))
        assert line.split("\t") == ["4", "11", "a\\tb", "true", "Exact", "x\\ny"]


class TestFormatLine(unittest.TestCase):
    def test_empty_line_for_no_matches(self) -> None:
        assert format_line([]) == "\n"

    def test_matches_followed_by_separator(self) -> None:
        out = format_line([make_match(), make_match(start=0, end=3, text="ask", label="Ask")])
        assert out == "4\t11\tjohnson\ttrue\tExact\tJohnson Corp\n0\t3\task\ttrue\tExact\tAsk\n\n"


class TestMatchRecord(unittest.TestCase):
    def test_label_and_type_shortcuts(self) -> None:
        match = make_match(match_type=MatchType.WHOLE_WORD)
        assert match.label == "Johnson Corp"
        assert match.match_type is MatchType.WHOLE_WORD
        assert match.match_type.is_whole_word
        assert not match.match_type.is_fuzzy

    def test_matches_compare_by_value(self) -> None:
        assert make_match() == make_match()
        assert make_match() != make_match(strict=False)


if __name__ == "__main__":
    unittest.main()
