"""Tests for quoted and interpolated string literals."""

import pytest

from lessparse.grammar.combinators import HardError, Input, Matched, NoMatch
from lessparse.grammar.nodes import InterpolatedString, Property, QuotedString, Variable
from lessparse.grammar.strings import quoted_string, string


def run(rule, source):
    return rule(Input.of(source))


# ---------------------------------------------------------------------------
# Plain strings
# ---------------------------------------------------------------------------


class TestQuotedString:
    def test_single_quoted(self):
        result = run(string("'"), "'test'")
        assert isinstance(result, Matched)
        assert result.rest.remaining == ""
        assert result.value == QuotedString("test")

    def test_double_quoted(self):
        result = run(string('"'), '"a b"')
        assert result.value == QuotedString("a b")
        assert result.value.quote == '"'

    def test_consumes_only_the_literal(self):
        result = run(string("'"), "'test' rest")
        assert result.rest.remaining == " rest"

    def test_empty(self):
        assert run(string("'"), "''").value == QuotedString("")

    def test_other_quote_inside(self):
        assert run(string("'"), "'say \"hi\"'").value == QuotedString('say "hi"')

    def test_escaped_quote_is_kept_verbatim(self):
        result = run(string("'"), r"'it\'s'")
        assert result.value == QuotedString(r"it\'s")
        assert result.rest.at_end

    def test_escaped_newline_continues_string(self):
        result = run(string("'"), "'a\\\nb'")
        assert result.value == QuotedString("a\\\nb")

    def test_markers_without_brace_are_literal(self):
        result = run(string("'"), "'a @ b $ c'")
        assert result.value == QuotedString("a @ b $ c")

    def test_borrows_from_source(self):
        result = run(string("'"), "'test'")
        assert result.value.text.is_borrowed
        assert result.value.text.span == (1, 5)

    def test_not_a_string(self):
        result = run(string("'"), '"test"')
        assert isinstance(result, NoMatch)

    def test_quoted_string_accepts_either_quote(self):
        assert run(quoted_string, "'a'").value == QuotedString("a")
        assert run(quoted_string, '"a"').value == QuotedString("a")
        assert isinstance(run(quoted_string, "a"), NoMatch)


# ---------------------------------------------------------------------------
# Interpolated strings
# ---------------------------------------------------------------------------


class TestInterpolatedString:
    def test_variable(self):
        result = run(string("'"), "'a @{b}'")
        assert isinstance(result, Matched)
        assert result.rest.remaining == ""
        assert result.value == InterpolatedString(["a ", ""], [Variable("b")])

    def test_property(self):
        result = run(string("'"), "'${a} b'")
        assert isinstance(result, Matched)
        assert result.rest.remaining == ""
        assert result.value == InterpolatedString(["", " b"], [Property("a")])

    def test_several(self):
        result = run(string('"'), '"@{a}-${b}"')
        assert result.value == InterpolatedString(
            ["", "-", ""], [Variable("a"), Property("b")]
        )

    @pytest.mark.parametrize(
        "contents",
        [
            "a @{b}",
            "${a} b",
            "@{x}@{y}",
            "url(@{base}/img/${name}.png)",
            "-@{a}-${b}-",
        ],
    )
    def test_round_trip(self, contents):
        result = run(string("'"), f"'{contents}'")
        value = result.value
        assert isinstance(value, InterpolatedString)
        assert len(value.segments) == len(value.interpolations) + 1
        assert value.render() == contents


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestStringErrors:
    def test_end_of_input(self):
        result = run(string("'"), "'abc")
        assert isinstance(result, HardError)
        assert result.rule == "string"
        assert result.at.at_end

    def test_unescaped_newline(self):
        result = run(string("'"), "'ab\ncd'")
        assert isinstance(result, HardError)
        assert result.at.pos == 3

    def test_end_of_input_after_interpolation(self):
        result = run(string("'"), "'a @{b} c")
        assert isinstance(result, HardError)
        assert result.rule == "string"

    @pytest.mark.parametrize("source", ["'@{ }'", "'@{1}'", "'${a'", "'@{a b}'"])
    def test_malformed_interpolation(self, source):
        result = run(string("'"), source)
        assert isinstance(result, HardError)
        assert result.rule == "string interpolation"
