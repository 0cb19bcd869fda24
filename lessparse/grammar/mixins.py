""" Mixin selectors

A mixin is defined with a single class or id selector:

    .bordered() { ... }

and called through an optional namespace path, the steps of which may be
joined by `>`, whitespace or nothing at all:

    .bordered();
    #namespace > .bordered();
    #namespace.bordered();
"""

from __future__ import annotations

from lessparse.grammar.combinators import Rule, alt, many0, mapped, opt, preceded, sequence
from lessparse.grammar.lexer import symbol, token
from lessparse.grammar.nodes import MixinSelector
from lessparse.grammar.selectors import class_selector, id_selector

__all__ = ["mixin_simple_selector", "mixin_selector"]

_mixin_name: Rule = alt(class_selector, id_selector, expected="mixin selector")

mixin_simple_selector: Rule = mapped(_mixin_name, MixinSelector.simple)

mixin_selector: Rule = mapped(
    sequence(
        token(_mixin_name),
        many0(preceded(opt(symbol(">")), token(_mixin_name))),
    ),
    lambda parts: MixinSelector((parts[0], *parts[1])),
)
