""" String literals

    'plain'                 QuotedString
    "a @{var} b ${prop}"    InterpolatedString

A backslash escapes the next character and is kept as written. After the
opening quote the string is committed: an unescaped newline, end of input or
a malformed interpolation is a hard error.
"""

from __future__ import annotations

from lessparse.grammar.combinators import (
    HardError,
    Input,
    Matched,
    NoMatch,
    Result,
    Rule,
    alt,
    cut,
    delimited,
    mapped,
)
from lessparse.grammar.lexer import ident, tag
from lessparse.grammar.nodes import InterpolatedString, Property, QuotedString, Text, Variable

__all__ = ["string", "quoted_string"]

INTERPOLATION_OPENERS = ("@{", "${")

def string(quote: str) -> Rule:
    """Parse a quoted or interpolated string delimited by `quote`."""
    first_part = string_part(quote)

    def literal(input: Input) -> Result:
        if not input.startswith(quote):
            return NoMatch(input, "string")

        first = first_part(input.advance(1))
        if not isinstance(first, Matched):
            return first

        # A closing quote straight after the first part means no interpolation
        if first.rest.startswith(quote):
            return Matched(QuotedString(first.value, quote), first.rest.advance(1))
        return interpolated_string_tail(quote, first.value)(first.rest)
    return literal

def string_part(quote: str) -> Rule:
    """Literal text up to the closing quote or the next interpolation opener."""
    def part(input: Input) -> Result:
        text = input.text
        pos = input.pos
        while pos < len(text):
            current = text[pos]
            if current == quote or text.startswith(INTERPOLATION_OPENERS, pos):
                return Matched(input.slice(pos), input.at(pos))
            elif current == "\\":
                pos += 2
            elif current == "\n":
                break
            else:
                pos += 1
        return HardError(input.at(min(pos, len(text))), f"closing {quote}", "string")
    return part

interpolated_part: Rule = alt(
    delimited(tag("@{"), mapped(ident, Variable), tag("}")),
    delimited(tag("${"), mapped(ident, Property), tag("}")),
    expected="interpolation",
)

def interpolated_string_tail(quote: str, first_part: Text) -> Rule:
    """Alternate interpolations and literal parts until the closing quote."""
    interpolation = cut(interpolated_part, "string interpolation")
    part = string_part(quote)

    def tail(input: Input) -> Result:
        segments = [first_part]
        interpolations = []
        while True:
            value = interpolation(input)
            if not isinstance(value, Matched):
                return value
            segment = part(value.rest)
            if not isinstance(segment, Matched):
                return segment

            interpolations.append(value.value)
            segments.append(segment.value)
            input = segment.rest
            if input.startswith(quote):
                return Matched(
                    InterpolatedString(segments, interpolations, quote),
                    input.advance(1),
                )
    return tail

quoted_string: Rule = alt(string('"'), string("'"), expected="string")
