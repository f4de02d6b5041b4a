"""Unit tests for field quoting."""
from __future__ import annotations

import pytest

from csvtable.encoding import escape_field, needs_quoting


class TestEscapeField:
    def test_plain_is_verbatim(self):
        assert escape_field("plain") == "plain"

    def test_empty_is_verbatim(self):
        assert escape_field("") == ""

    def test_comma_and_quotes(self):
        assert escape_field('Hello, "World"') == '"Hello, ""World"""'

    def test_quote_only(self):
        assert escape_field('5" wrench') == '"5"" wrench"'

    def test_leading_space(self):
        assert escape_field("  leading space") == '"  leading space"'

    def test_trailing_space(self):
        assert escape_field("trailing ") == '"trailing "'

    def test_inner_space_is_verbatim(self):
        assert escape_field("Oil change") == "Oil change"

    def test_literal_backslash_n(self):
        assert escape_field("line1\\nline2") == '"line1\\nline2"'

    def test_real_newline_is_not_quoted_by_default(self):
        assert escape_field("line1\nline2") == "line1\nline2"

    def test_real_carriage_return_is_not_quoted_by_default(self):
        assert escape_field("a\rb") == "a\rb"

    @pytest.mark.parametrize("raw", ["line1\nline2", "a\rb", "a\r\nb"])
    def test_line_breaks_quoted_when_enabled(self, raw):
        assert escape_field(raw, quote_line_breaks=True) == f'"{raw}"'

    @pytest.mark.parametrize("raw", ["=SUM(A1:A2)", "+1", "-1", "@cmd"])
    def test_formula_prefixes_are_not_sanitised(self, raw):
        assert escape_field(raw) == raw


class TestNeedsQuoting:
    @pytest.mark.parametrize("raw", [",", '"', "\\n", " x", "x "])
    def test_triggers(self, raw):
        assert needs_quoting(raw)

    @pytest.mark.parametrize("raw", ["", "abc", "a b", "a\tb", "a;b"])
    def test_non_triggers(self, raw):
        assert not needs_quoting(raw)
