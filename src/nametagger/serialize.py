"""Tab-separated rendering of match records."""

from __future__ import annotations

from collections.abc import Iterable

from .records import Match


def _escape_field(text: str) -> str:
    # Fields are tab-separated and records newline-terminated.
    return text.replace("\t", "\\t").replace("\n", "\\n")


def format_match(match: Match) -> str:
    """Render ``start end text strict type label`` separated by tabs."""
    return "\t".join(
        (
            str(match.start),
            str(match.end),
            _escape_field(match.text),
            "true" if match.strict else "false",
            match.match_type.value,
            _escape_field(match.label),
        )
    )


def format_line(matches: Iterable[Match]) -> str:
    """Render all matches of one input line, followed by an empty line."""
    parts = [format_match(match) for match in matches]
    parts.append("")
    return "\n".join(parts) + "\n"
