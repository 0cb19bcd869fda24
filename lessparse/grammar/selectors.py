""" Selectors

    #ident   id
    .ident   class
    ident    type
    *        universal

Only simple selectors are understood; combinators are not.
"""

from __future__ import annotations

from lessparse.grammar.combinators import Rule, alt, mapped, preceded, separated1
from lessparse.grammar.lexer import ident, symbol, tag, token
from lessparse.grammar.nodes import Selector

__all__ = [
    "id_selector",
    "class_selector",
    "type_selector",
    "universal_selector",
    "simple_selector",
    "selector_group",
]

id_selector: Rule = mapped(preceded(tag("#"), ident), lambda name: Selector("id", name))
class_selector: Rule = mapped(preceded(tag("."), ident), lambda name: Selector("class", name))
type_selector: Rule = mapped(ident, lambda name: Selector("type", name))
universal_selector: Rule = mapped(tag("*"), lambda star: Selector("universal", star))

simple_selector: Rule = token(alt(
    id_selector,
    class_selector,
    type_selector,
    universal_selector,
    expected="selector",
))

# A comma commits, so `.a, {` is an error rather than an empty group member.
selector_group: Rule = separated1(simple_selector, symbol(","), "selector group")
