""" Parser combinators

A rule is a function from an `Input` cursor to one of three outcomes:

    Matched(value, rest)   the rule matched; `rest` is the input after it
    NoMatch(at, expected)  the rule did not match; callers may try something else
    HardError(at, ...)     the rule committed and then failed; nothing may retry

A `NoMatch` never moves the caller's cursor: callers keep their own `Input` and
`at` only records where the mismatch was noticed, for diagnostics. `cut`
turns a `NoMatch` into a `HardError` once a rule has seen enough to know it is
the right alternative.
"""

from __future__ import annotations
from bisect import bisect_right
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union
from typing_extensions import TypeAliasType

from lessparse.grammar.nodes import Text
from lessparse.options import OptionalParserOptions, ParserOptions, default_options

__all__ = [
    "Source",
    "Input",
    "Matched",
    "NoMatch",
    "HardError",
    "Result",
    "Rule",

    "alt",
    "sequence",
    "many0",
    "many1",
    "opt",
    "cut",
    "mapped",
    "peek",
    "preceded",
    "terminated",
    "delimited",
    "separated1",
    "eof",
]

T = TypeVar("T")

class Source:
    """The text being parsed together with the options it is parsed with."""

    def __init__(
        self,
        text: str,
        options: OptionalParserOptions | None = None,
        url: str | None = None,
    ) -> None:
        self.text = text
        self.options: ParserOptions = default_options(options)
        self.url = url
        self._line_starts: list[int] | None = None

    def location(self, offset: int) -> tuple[int, int]:
        """1-based line and column of a character offset."""
        if self._line_starts is None:
            self._line_starts = [0] + [i + 1 for i, c in enumerate(self.text) if c == "\n"]
        line = bisect_right(self._line_starts, offset) - 1
        return line + 1, offset - self._line_starts[line] + 1

    def line(self, number: int) -> str:
        lines = self.text.split("\n")
        if 1 <= number <= len(lines):
            return lines[number - 1].rstrip("\r")
        return ""

    def __repr__(self) -> str:
        return f"Source({self.url or '<input>'}, {len(self.text)} chars)"

@dataclass(frozen=True)
class Input:
    """Immutable cursor into a `Source`, plus the current block nesting depth."""
    source: Source
    pos: int = 0
    depth: int = 0

    @staticmethod
    def of(
        text: str,
        options: OptionalParserOptions | None = None,
        url: str | None = None,
    ) -> Input:
        return Input(Source(text, options, url))

    @property
    def text(self) -> str:
        return self.source.text

    @property
    def remaining(self) -> str:
        return self.source.text[self.pos:]

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.source.text)

    def peek(self, amount: int = 1) -> str:
        """The next `amount` characters, shorter near the end of input."""
        return self.source.text[self.pos:self.pos + amount]

    def startswith(self, prefix: str | tuple[str, ...]) -> bool:
        return self.source.text.startswith(prefix, self.pos)

    def at(self, pos: int) -> Input:
        return Input(self.source, pos, self.depth)

    def advance(self, amount: int) -> Input:
        return self.at(self.pos + amount)

    def nested(self) -> Input:
        return Input(self.source, self.pos, self.depth + 1)

    def slice(self, end: int | Input) -> Text:
        """Borrow the source text between this cursor and `end`."""
        if isinstance(end, Input):
            end = end.pos
        return Text.borrowed(self.source.text, self.pos, end)

    def __repr__(self) -> str:
        return f"Input(pos={self.pos}, depth={self.depth}, remaining={self.remaining[:20]!r})"

@dataclass(frozen=True)
class Matched(Generic[T]):
    value: T
    rest: Input

@dataclass(frozen=True)
class NoMatch:
    at: Input
    expected: str

@dataclass(frozen=True)
class HardError:
    at: Input
    expected: str
    rule: str

Result = TypeAliasType("Result", Union[Matched, NoMatch, HardError])
Rule = TypeAliasType("Rule", Callable[[Input], Result])

def alt(*rules: Rule, expected: str | None = None) -> Rule:
    """Ordered choice: the first rule that does not `NoMatch` decides the outcome.

    If every rule misses, the miss that got furthest into the input is reported,
    relabelled with `expected` when given.
    """
    def choice(input: Input) -> Result:
        furthest: NoMatch | None = None
        for rule in rules:
            result = rule(input)
            if not isinstance(result, NoMatch):
                return result
            if furthest is None or result.at.pos > furthest.at.pos:
                furthest = result
        if furthest is None:
            return NoMatch(input, expected or "nothing")
        if expected is not None:
            return NoMatch(furthest.at, expected)
        return furthest
    return choice

def sequence(*rules: Rule) -> Rule:
    """All rules in order; matches a tuple of their values."""
    def chain(input: Input) -> Result:
        values = []
        for rule in rules:
            result = rule(input)
            if not isinstance(result, Matched):
                return result
            values.append(result.value)
            input = result.rest
        return Matched(tuple(values), input)
    return chain

def many0(rule: Rule) -> Rule:
    """Zero or more repetitions. Stops at the first miss or at a match that consumed nothing."""
    def repeat(input: Input) -> Result:
        values = []
        while True:
            result = rule(input)
            if isinstance(result, HardError):
                return result
            if isinstance(result, NoMatch) or result.rest.pos == input.pos:
                return Matched(tuple(values), input)
            values.append(result.value)
            input = result.rest
    return repeat

def many1(rule: Rule) -> Rule:
    repeat = many0(rule)
    def at_least_one(input: Input) -> Result:
        first = rule(input)
        if not isinstance(first, Matched):
            return first
        others = repeat(first.rest)
        if not isinstance(others, Matched):
            return others
        return Matched((first.value, *others.value), others.rest)
    return at_least_one

def opt(rule: Rule) -> Rule:
    def optional(input: Input) -> Result:
        result = rule(input)
        if isinstance(result, NoMatch):
            return Matched(None, input)
        return result
    return optional

def cut(rule: Rule, context: str) -> Rule:
    """Commit to `rule`: a miss becomes a `HardError` attributed to `context`."""
    def committed(input: Input) -> Result:
        result = rule(input)
        if isinstance(result, NoMatch):
            return HardError(result.at, result.expected, context)
        return result
    return committed

def mapped(rule: Rule, fn: Callable[[Any], Any]) -> Rule:
    def transform(input: Input) -> Result:
        result = rule(input)
        if isinstance(result, Matched):
            return Matched(fn(result.value), result.rest)
        return result
    return transform

def peek(rule: Rule) -> Rule:
    """Match `rule` without consuming anything."""
    def lookahead(input: Input) -> Result:
        result = rule(input)
        if isinstance(result, Matched):
            return Matched(result.value, input)
        return result
    return lookahead

def preceded(prefix: Rule, rule: Rule) -> Rule:
    return mapped(sequence(prefix, rule), lambda values: values[1])

def terminated(rule: Rule, suffix: Rule) -> Rule:
    return mapped(sequence(rule, suffix), lambda values: values[0])

def delimited(open: Rule, rule: Rule, close: Rule) -> Rule:
    return mapped(sequence(open, rule, close), lambda values: values[1])

def separated1(rule: Rule, separator: Rule, context: str) -> Rule:
    """One or more `rule` joined by `separator`.

    A separator commits: what follows it must match `rule`, otherwise the
    parse fails with a `HardError` attributed to `context`.
    """
    after_separator = cut(rule, context)
    def separated(input: Input) -> Result:
        first = rule(input)
        if not isinstance(first, Matched):
            return first
        values = [first.value]
        input = first.rest
        while True:
            sep = separator(input)
            if isinstance(sep, HardError):
                return sep
            if isinstance(sep, NoMatch):
                return Matched(tuple(values), input)
            result = after_separator(sep.rest)
            if not isinstance(result, Matched):
                return result
            values.append(result.value)
            input = result.rest
    return separated

def eof(input: Input) -> Result:
    if input.at_end:
        return Matched(None, input)
    return NoMatch(input, "end of input")
