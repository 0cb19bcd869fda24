"""Tests for the AST node types."""

import pytest

from lessparse.grammar.nodes import (
    Declaration,
    DetachedRuleset,
    Function,
    Identifier,
    InterpolatedString,
    MixinDeclaration,
    MixinSelector,
    Number,
    Property,
    QualifiedRule,
    QuotedString,
    Selector,
    Text,
    ValueList,
    Variable,
    VariableDeclaration,
    walk,
)


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------


class TestText:
    def test_owned(self):
        text = Text("abc")
        assert not text.is_borrowed
        assert text.span is None
        assert str(text) == "abc"
        assert len(text) == 3

    def test_borrowed(self):
        source = "color: red;"
        text = Text.borrowed(source, 7, 10)
        assert text.is_borrowed
        assert text.span == (7, 10)
        assert str(text) == "red"
        assert len(text) == 3

    def test_equality_with_str_and_text(self):
        borrowed = Text.borrowed("xredx", 1, 4)
        assert borrowed == "red"
        assert "red" == borrowed
        assert borrowed == Text("red")
        assert borrowed != "blue"
        assert hash(borrowed) == hash("red") == hash(Text("red"))

    def test_to_owned(self):
        borrowed = Text.borrowed("xredx", 1, 4)
        owned = borrowed.to_owned()
        assert not owned.is_borrowed
        assert owned == borrowed
        assert owned.to_owned() is owned

    def test_of(self):
        text = Text("a")
        assert Text.of(text) is text
        assert Text.of("a") == text

    def test_repr(self):
        assert repr(Text.borrowed("'a'", 1, 2)) == "'a'"


# ---------------------------------------------------------------------------
# Values
# ---------------------------------------------------------------------------


class TestInterpolatedString:
    def test_segment_count_invariant(self):
        with pytest.raises(ValueError):
            InterpolatedString(["a"], [Variable("b")])
        with pytest.raises(ValueError):
            InterpolatedString(["a", "b", "c"], [Variable("b")])

    def test_render_default(self):
        value = InterpolatedString(["a ", "!"], [Variable("b")])
        assert value.render() == "a @{b}!"

    def test_render_with_resolver(self):
        value = InterpolatedString(["", " and ", ""], [Variable("a"), Property("b")])
        resolved = value.render(lambda ref: str(ref.name).upper())
        assert resolved == "A and B"

    def test_str(self):
        value = InterpolatedString(["", ""], [Property("p")], "'")
        assert str(value) == "'${p}'"

    def test_lists_become_tuples(self):
        value = InterpolatedString(["a", ""], [Variable("b")])
        assert isinstance(value.segments, tuple)
        assert isinstance(value.interpolations, tuple)
        assert all(isinstance(s, Text) for s in value.segments)


class TestValueStr:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (Number("10", "px"), "10px"),
            (Number("1.5"), "1.5"),
            (QuotedString("a", "'"), "'a'"),
            (Function("rgba", [Number("0"), Number("1")]), "rgba(0, 1)"),
            (ValueList([Number("1", "px"), Identifier("solid")]), "1px solid"),
            (ValueList([Identifier("a"), Identifier("b")], ","), "a, b"),
            (ValueList([Number("12", "px"), Number("1.5")], "/"), "12px/1.5"),
        ],
    )
    def test_str(self, value, expected):
        assert str(value) == expected

    def test_quote_is_not_compared(self):
        assert QuotedString("a", "'") == QuotedString("a", '"')


# ---------------------------------------------------------------------------
# Selectors and items
# ---------------------------------------------------------------------------


class TestSelectors:
    def test_str(self):
        assert str(Selector("id", "a")) == "#a"
        assert str(Selector("class", "a")) == ".a"
        assert str(Selector("type", "div")) == "div"
        assert str(MixinSelector((Selector("id", "ns"), Selector("class", "m")))) == "#ns > .m"

    def test_empty_mixin_selector(self):
        with pytest.raises(ValueError):
            MixinSelector(())

    def test_empty_selector_group(self):
        with pytest.raises(ValueError):
            QualifiedRule([], [])


class TestWalk:
    def test_depth_first(self):
        inner = Declaration("a", Identifier("b"))
        items = [
            QualifiedRule([Selector("class", "x")], [inner]),
            VariableDeclaration("d", DetachedRuleset([inner])),
            MixinDeclaration(MixinSelector.simple(Selector("class", "m")), []),
        ]
        assert list(walk(items)) == [items[0], inner, items[1], inner, items[2]]
