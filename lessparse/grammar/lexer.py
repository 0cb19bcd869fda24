""" LESS LEXING
https://lesscss.org/features/
https://www.w3.org/TR/css-syntax-3/#tokenizing-and-parsing

There is no token stream. The primitives below recognize one lexical unit at
the cursor and every grammar rule is built from them, so trivia (whitespace
and comments) is skipped by `token` right before each unit.

    junk        whitespace, /* block */ and // line comments
    tag         an exact literal, no trivia skipped
    symbol      trivia, then an exact literal
    ident       -?-?[a-zA-Z_\\u0080-][a-zA-Z0-9_\\-\\u0080-]*
    at_keyword  @ident
"""

from __future__ import annotations

from lessparse.grammar.combinators import (
    HardError,
    Input,
    Matched,
    NoMatch,
    Result,
    Rule,
    eof,
    terminated,
)

__all__ = ["Check", "junk", "token", "tag", "symbol", "ident", "at_keyword", "parse"]

class Check:
    @staticmethod
    def letter(current: str | None) -> bool:
        return current is not None and current.isalpha()

    @staticmethod
    def non_ascii(current: str | None) -> bool:
        return current is not None and current != "" and ord(current) >= ord('\u0080')

    @staticmethod
    def ident_start(current: str | None) -> bool:
        return current is not None and (Check.letter(current) or Check.non_ascii(current) or current == "_")

    @staticmethod
    def digit(current: str | None) -> bool:
        return current is not None and current.isdigit()

    @staticmethod
    def whitespace(current: str | None) -> bool:
        return current is not None and current != "" and current in '\t\n\r\f '

    @staticmethod
    def hex(current: str | None) -> bool:
        return current is not None and current != "" and (current.isdigit() or current in 'abcdefABCDEF')

    @staticmethod
    def ident(current: str | None) -> bool:
        return current is not None and (Check.ident_start(current) or Check.digit(current) or current == "-")

def junk(input: Input) -> Result:
    """Skip whitespace and comments. Only an unclosed block comment fails."""
    text = input.text
    line_comments = input.source.options["line_comments"]
    pos = input.pos
    while pos < len(text):
        if Check.whitespace(text[pos]):
            pos += 1
        elif text.startswith("/*", pos):
            end = text.find("*/", pos + 2)
            if end == -1:
                return HardError(input.at(pos), "'*/'", "comment")
            pos = end + 2
        elif line_comments and text.startswith("//", pos):
            end = text.find("\n", pos + 2)
            pos = len(text) if end == -1 else end + 1
        else:
            break
    return Matched(None, input.at(pos))

def token(rule: Rule) -> Rule:
    """`rule` with leading whitespace and comments stripped."""
    def skip_then(input: Input) -> Result:
        skipped = junk(input)
        if not isinstance(skipped, Matched):
            return skipped
        return rule(skipped.rest)
    return skip_then

def tag(literal: str) -> Rule:
    expected = repr(literal)
    def exact(input: Input) -> Result:
        if input.startswith(literal):
            end = input.advance(len(literal))
            return Matched(input.slice(end), end)
        return NoMatch(input, expected)
    return exact

def symbol(literal: str) -> Rule:
    return token(tag(literal))

def ident(input: Input) -> Result:
    text = input.text
    pos = input.pos
    for _ in range(2):
        if pos < len(text) and text[pos] == "-":
            pos += 1
    if pos >= len(text) or not Check.ident_start(text[pos]):
        return NoMatch(input, "identifier")
    while pos < len(text) and Check.ident(text[pos]):
        pos += 1
    return Matched(input.slice(pos), input.at(pos))

def at_keyword(input: Input) -> Result:
    """`@name`, matching the name without the `@`."""
    if not input.startswith("@"):
        return NoMatch(input, "at-keyword")
    name = ident(input.advance(1))
    if not isinstance(name, Matched):
        return NoMatch(input, "at-keyword")
    return name

def parse(rule: Rule, expected: str = "end of input") -> Rule:
    """Apply `rule` to the whole input: only trivia may follow it."""
    def end(input: Input) -> Result:
        result = eof(input)
        if isinstance(result, NoMatch):
            return NoMatch(input, expected)
        return result
    return terminated(rule, token(end))
