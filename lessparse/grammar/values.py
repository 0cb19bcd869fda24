""" Declaration values

    value        = space-list ("," space-list)*
    space-list   = slash-list+
    slash-list   = primitive ("/" primitive)*
    primitive    = string | color | number | url | function
                 | @variable | $property | identifier
    function     = ident "(" [value] ")"

Lists of a single element collapse to the element itself. A value ends at
the first character no primitive accepts: `;`, `}`, `)` or `!important`.
"""

from __future__ import annotations
import re

from lessparse.grammar.combinators import (
    HardError,
    Input,
    Matched,
    NoMatch,
    Result,
    Rule,
    alt,
    cut,
    many1,
    mapped,
    opt,
    preceded,
    separated1,
    terminated,
)
from lessparse.grammar.lexer import Check, at_keyword, ident, symbol, tag, token
from lessparse.grammar.nodes import (
    Color,
    Function,
    Identifier,
    Number,
    PropertyRef,
    Url,
    ValueList,
    VariableRef,
)
from lessparse.grammar.strings import quoted_string

__all__ = ["declaration_value", "primitive", "color", "number", "url", "function"]

NUMBER = re.compile(r"[+-]?(?:\d*\.\d+|\d+)(?:[eE][+-]?\d+)?")
HEX_LENGTHS = (3, 4, 6, 8)

def collapse(separator: str):
    def build(values: tuple) -> object:
        if len(values) == 1:
            return values[0]
        return ValueList(values, separator)
    return build

def color(input: Input) -> Result:
    """`#` followed by 3, 4, 6 or 8 hex digits."""
    if not input.startswith("#"):
        return NoMatch(input, "color")
    start = input.advance(1)
    pos = start.pos
    while pos < len(input.text) and Check.hex(input.text[pos]):
        pos += 1
    if pos - start.pos not in HEX_LENGTHS or Check.ident(input.text[pos:pos + 1]):
        return NoMatch(input, "color")
    return Matched(Color(start.slice(pos)), input.at(pos))

def number(input: Input) -> Result:
    """A number with an optional unit or `%`."""
    match = NUMBER.match(input.text, input.pos)
    if match is None:
        return NoMatch(input, "number")
    value = input.slice(match.end())
    rest = input.at(match.end())

    if rest.startswith("%"):
        return Matched(Number(value, rest.slice(rest.pos + 1)), rest.advance(1))

    pos = rest.pos
    while pos < len(input.text) and Check.letter(input.text[pos]):
        pos += 1
    if pos > rest.pos:
        return Matched(Number(value, rest.slice(pos)), input.at(pos))
    return Matched(Number(value), rest)

def url(input: Input) -> Result:
    """Unquoted `url(...)`. A quoted argument is left to `function`."""
    if input.peek(4).lower() != "url(":
        return NoMatch(input, "url")
    text = input.text
    start = input.pos + 4
    while start < len(text) and Check.whitespace(text[start]):
        start += 1
    if text[start:start + 1] in ('"', "'"):
        return NoMatch(input, "url")

    end = start
    while end < len(text) and text[end] != ")":
        if text[end] == "\n" or text[end] in "\"'(":
            return HardError(input.at(end), "')'", "url")
        end += 1
    if end >= len(text):
        return HardError(input.at(end), "')'", "url")

    stop = end
    while stop > start and Check.whitespace(text[stop - 1]):
        stop -= 1
    return Matched(Url(input.at(start).slice(stop)), input.at(end + 1))

def function(input: Input) -> Result:
    """`name(arguments)`. The opening parenthesis commits.

    Arguments sit one level deeper than the call, counted against the same
    `max_depth` as nested blocks.
    """
    name = ident(input)
    if not isinstance(name, Matched) or not name.rest.startswith("("):
        return NoMatch(input, "function")

    limit = input.source.options["max_depth"]
    if input.depth >= limit:
        return HardError(name.rest, f"at most {limit} nested calls", "function")

    arguments = cut(
        terminated(opt(separated1(space_list, symbol(","), "function")), symbol(")")),
        "function",
    )(name.rest.advance(1).nested())
    if not isinstance(arguments, Matched):
        return arguments
    return Matched(Function(name.value, arguments.value or ()), input.at(arguments.rest.pos))

primitive: Rule = token(alt(
    quoted_string,
    color,
    number,
    url,
    function,
    mapped(at_keyword, VariableRef),
    mapped(preceded(tag("$"), ident), PropertyRef),
    mapped(ident, Identifier),
    expected="value",
))

# `12px/1.5`; the slash binds tighter than the space
slash_list: Rule = mapped(separated1(primitive, symbol("/"), "value list"), collapse("/"))

space_list: Rule = mapped(many1(slash_list), collapse(" "))

declaration_value: Rule = mapped(
    separated1(space_list, symbol(","), "value list"),
    collapse(","),
)
