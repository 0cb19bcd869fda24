"""Tests for selector groups and mixin selectors."""

import pytest

from lessparse import Parse, ParseError
from lessparse.grammar.combinators import Input, Matched, NoMatch
from lessparse.grammar.lexer import parse
from lessparse.grammar.mixins import mixin_selector, mixin_simple_selector
from lessparse.grammar.nodes import MixinSelector, Selector
from lessparse.grammar.selectors import class_selector, id_selector


# ---------------------------------------------------------------------------
# Simple selectors
# ---------------------------------------------------------------------------


class TestSimpleSelectors:
    def test_id(self):
        result = id_selector(Input.of("#main"))
        assert isinstance(result, Matched)
        assert result.value == Selector("id", "main")

    def test_class(self):
        result = class_selector(Input.of(".nav-bar {"))
        assert result.value == Selector("class", "nav-bar")
        assert result.rest.remaining == " {"

    def test_id_is_not_class(self):
        assert isinstance(class_selector(Input.of("#main")), NoMatch)

    def test_dot_needs_identifier(self):
        assert isinstance(class_selector(Input.of(". a")), NoMatch)


# ---------------------------------------------------------------------------
# Selector groups
# ---------------------------------------------------------------------------


class TestSelectorGroup:
    def test_single(self):
        assert Parse.parse_selector_group("#main") == (Selector("id", "main"),)

    def test_several(self):
        assert Parse.parse_selector_group(".a, .b,#c") == (
            Selector("class", "a"),
            Selector("class", "b"),
            Selector("id", "c"),
        )

    def test_type_and_universal(self):
        assert Parse.parse_selector_group("div, *") == (
            Selector("type", "div"),
            Selector("universal", "*"),
        )

    @pytest.mark.parametrize("source", [".a,", ".a, , .b", ".a,{"])
    def test_stray_comma_is_hard_error(self, source):
        with pytest.raises(ParseError) as exc:
            Parse.parse_selector_group(source)
        assert exc.value.rule == "selector group"

    def test_empty(self):
        with pytest.raises(ParseError) as exc:
            Parse.parse_selector_group("")
        assert exc.value.rule is None
        assert exc.value.expected == "selector"


# ---------------------------------------------------------------------------
# Mixin selectors
# ---------------------------------------------------------------------------


class TestMixinSelectors:
    def test_simple(self):
        result = mixin_simple_selector(Input.of(".btn()"))
        assert result.value == MixinSelector.simple(Selector("class", "btn"))
        assert result.rest.remaining == "()"

    def test_simple_rejects_type_selector(self):
        assert isinstance(mixin_simple_selector(Input.of("div")), NoMatch)

    @pytest.mark.parametrize("source", ["#ns > .m", "#ns.m", "#ns .m", "  #ns>.m"])
    def test_namespace_path(self, source):
        result = parse(mixin_selector)(Input.of(source))
        assert isinstance(result, Matched)
        assert result.value == MixinSelector((Selector("id", "ns"), Selector("class", "m")))
        assert result.value.name == Selector("class", "m")

    def test_dangling_child_combinator_is_left_unconsumed(self):
        result = mixin_selector(Input.of(".a > ("))
        assert result.value == MixinSelector.simple(Selector("class", "a"))
        assert result.rest.remaining == " > ("
