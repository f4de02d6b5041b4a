"""Encoding – field quoting.

A raw cell is wrapped in double quotes, with inner quotes doubled, when it
contains a comma, a double quote, or the two-character sequence backslash-n,
or when it starts or ends with a space.

The backslash-n test matches the literal text ``\\n``, not a line feed, so
cells holding real line breaks are emitted unquoted. Pass
``quote_line_breaks=True`` to also quote on CR and LF characters.

Leading ``=``, ``+``, ``-`` or ``@`` are left alone: this is not a
spreadsheet formula-injection guard.
"""
from __future__ import annotations

__all__ = ["escape_field", "needs_quoting"]

_LITERAL_NEWLINE = "\\n"


def needs_quoting(raw: str, *, quote_line_breaks: bool = False) -> bool:
    if (
        "," in raw
        or '"' in raw
        or _LITERAL_NEWLINE in raw
        or raw.startswith(" ")
        or raw.endswith(" ")
    ):
        return True
    return quote_line_breaks and ("\n" in raw or "\r" in raw)


def escape_field(raw: str, *, quote_line_breaks: bool = False) -> str:
    """Return *raw* as a CSV-safe field."""
    if not needs_quoting(raw, quote_line_breaks=quote_line_breaks):
        return raw
    escaped = raw.replace('"', '""')
    return f'"{escaped}"'
