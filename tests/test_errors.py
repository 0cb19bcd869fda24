"""Tests for ParseError reporting."""

import pytest

from lessparse import ParseError, parse_stylesheet


def error_for(source, **kwargs) -> ParseError:
    with pytest.raises(ParseError) as exc:
        parse_stylesheet(source, **kwargs)
    return exc.value


class TestParseError:
    def test_attributes(self):
        error = ParseError("boom", offset=3, line=1, column=4, rule="block", expected="'}'")
        assert error.message == "boom"
        assert error.rule == "block"
        assert str(error) == "<input>:1:4: boom"

    def test_message_names_rule_and_found_text(self):
        error = error_for("a { color: red {")
        assert error.message == "expected ';', found '{' (in declaration)"

    def test_end_of_input_described(self):
        error = error_for("a { color: red;")
        assert "found end of input" in error.message

    def test_unclosed_comment(self):
        error = error_for("a: b; /* open")
        assert error.rule == "comment"
        assert error.offset == 6

    def test_source_line_recorded(self):
        error = error_for("a: b;\nc: ;\n")
        assert error.line == 2
        assert error.source_line == "c: ;"


class TestPretty:
    def test_contains_location_and_source(self):
        error = error_for("a {\n  color: ;\n}", url="site.less")
        out = error.pretty()
        assert "error" in out
        assert error.message in out
        assert "site.less:2:10" in out
        assert "  color: ;" in out
        assert "^" in out

    def test_without_source_line(self):
        error = ParseError("boom", offset=0, line=1, column=1)
        assert "^" not in error.pretty()
