""" LESS AST

Every node is immutable. Strings inside the tree are `Text` values which either
borrow a span of the parsed source or own a copy of their characters.
"""

from __future__ import annotations
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Literal, Union
from typing_extensions import TypeAliasType

__all__ = [
    "Text",

    "Stylesheet",
    "Declaration",
    "QualifiedRule",
    "MixinDeclaration",
    "MixinCall",
    "VariableDeclaration",
    "VariableCall",
    "Item",

    "Variable",
    "Property",
    "InterpolatedValue",

    "QuotedString",
    "InterpolatedString",
    "Number",
    "Color",
    "Identifier",
    "VariableRef",
    "PropertyRef",
    "Function",
    "Url",
    "ValueList",
    "DetachedRuleset",
    "Value",

    "Selector",
    "MixinSelector",

    "walk",
]

class Text:
    """Copy-on-write string: a view into the source buffer or an owned string.

    Compares and hashes like the `str` it stands for.
    """
    __slots__ = ("_source", "_start", "_end", "_owned")

    def __init__(self, owned: str = "") -> None:
        self._source: str | None = None
        self._start = 0
        self._end = len(owned)
        self._owned: str | None = owned

    @staticmethod
    def borrowed(source: str, start: int, end: int) -> Text:
        text = Text()
        text._source = source
        text._start = start
        text._end = end
        text._owned = None
        return text

    @staticmethod
    def of(value: str | Text) -> Text:
        if isinstance(value, Text):
            return value
        return Text(value)

    @property
    def is_borrowed(self) -> bool:
        return self._source is not None

    @property
    def span(self) -> tuple[int, int] | None:
        """Start and end offsets in the source, `None` for owned text."""
        if self._source is None:
            return None
        return (self._start, self._end)

    def to_owned(self) -> Text:
        if self._owned is not None:
            return self
        return Text(str(self))

    def __str__(self) -> str:
        if self._owned is not None:
            return self._owned
        return self._source[self._start:self._end]

    def __len__(self) -> int:
        return self._end - self._start

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (Text, str)):
            return str(self) == str(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(str(self))

    def __repr__(self) -> str:
        return repr(str(self))

def _text(node, *names: str):
    for name in names:
        value = getattr(node, name)
        if value is not None:
            object.__setattr__(node, name, Text.of(value))

def _tuple(node, *names: str):
    for name in names:
        object.__setattr__(node, name, tuple(getattr(node, name)))

# Interpolations

@dataclass(frozen=True)
class Variable:
    """`@{name}` inside a string."""
    name: Text

    def __post_init__(self):
        _text(self, "name")

    def __str__(self) -> str:
        return f"@{{{self.name}}}"

@dataclass(frozen=True)
class Property:
    """`${name}` inside a string."""
    name: Text

    def __post_init__(self):
        _text(self, "name")

    def __str__(self) -> str:
        return f"${{{self.name}}}"

InterpolatedValue = TypeAliasType("InterpolatedValue", Union[Variable, Property])

# Values

@dataclass(frozen=True)
class QuotedString:
    text: Text
    quote: Literal["'", '"'] = field(default='"', compare=False)

    def __post_init__(self):
        _text(self, "text")

    def __str__(self) -> str:
        return f"{self.quote}{self.text}{self.quote}"

@dataclass(frozen=True)
class InterpolatedString:
    """A string literal with `@{var}` / `${prop}` references.

    `segments` holds the literal runs around the interpolations, so there is
    always exactly one more segment than there are interpolations.
    """
    segments: tuple[Text, ...]
    interpolations: tuple[InterpolatedValue, ...]
    quote: Literal["'", '"'] = field(default='"', compare=False)

    def __post_init__(self):
        object.__setattr__(self, "segments", tuple(Text.of(s) for s in self.segments))
        _tuple(self, "interpolations")
        if len(self.segments) != len(self.interpolations) + 1:
            raise ValueError(
                f"Expected {len(self.interpolations) + 1} segments for "
                f"{len(self.interpolations)} interpolations, got {len(self.segments)}"
            )

    def render(self, resolve: Callable[[InterpolatedValue], str] = str) -> str:
        """Concatenate the segments with every interpolation replaced by `resolve(value)`.

        The default resolver writes the references back out, reproducing the
        string contents as written.
        """
        parts = [str(self.segments[0])]
        for value, segment in zip(self.interpolations, self.segments[1:]):
            parts.append(resolve(value))
            parts.append(str(segment))
        return "".join(parts)

    def __str__(self) -> str:
        return f"{self.quote}{self.render()}{self.quote}"

@dataclass(frozen=True)
class Number:
    value: Text
    unit: Text | None = None

    def __post_init__(self):
        _text(self, "value", "unit")

    @property
    def number(self) -> int | float:
        raw = str(self.value)
        if any(c in raw for c in ".eE"):
            return float(raw)
        return int(raw)

    def __str__(self) -> str:
        return f"{self.value}{self.unit or ''}"

@dataclass(frozen=True)
class Color:
    """Hex color without the leading `#`."""
    hex: Text

    def __post_init__(self):
        _text(self, "hex")

    def __str__(self) -> str:
        return f"#{self.hex}"

@dataclass(frozen=True)
class Identifier:
    name: Text

    def __post_init__(self):
        _text(self, "name")

    def __str__(self) -> str:
        return str(self.name)

@dataclass(frozen=True)
class VariableRef:
    """`@name` used as a value."""
    name: Text

    def __post_init__(self):
        _text(self, "name")

    def __str__(self) -> str:
        return f"@{self.name}"

@dataclass(frozen=True)
class PropertyRef:
    """`$name` used as a value."""
    name: Text

    def __post_init__(self):
        _text(self, "name")

    def __str__(self) -> str:
        return f"${self.name}"

@dataclass(frozen=True)
class Function:
    name: Text
    arguments: tuple[Value, ...] = ()

    def __post_init__(self):
        _text(self, "name")
        _tuple(self, "arguments")

    def __str__(self) -> str:
        return f"{self.name}({', '.join(str(arg) for arg in self.arguments)})"

@dataclass(frozen=True)
class Url:
    """Unquoted `url(...)`; quoted urls are plain `Function` calls."""
    text: Text

    def __post_init__(self):
        _text(self, "text")

    def __str__(self) -> str:
        return f"url({self.text})"

@dataclass(frozen=True)
class ValueList:
    values: tuple[Value, ...]
    separator: Literal[" ", ",", "/"] = " "

    def __post_init__(self):
        _tuple(self, "values")

    def __str__(self) -> str:
        sep = ", " if self.separator == "," else self.separator
        return sep.join(str(value) for value in self.values)

@dataclass(frozen=True)
class DetachedRuleset:
    """`@name: { ... }`, invoked later with `@name();`."""
    block: tuple[Item, ...]

    def __post_init__(self):
        _tuple(self, "block")

    def __repr__(self) -> str:
        return f"DetachedRuleset(block=[{len(self.block)} items])"

Value = TypeAliasType(
    "Value",
    Union[
        QuotedString,
        InterpolatedString,
        Number,
        Color,
        Identifier,
        VariableRef,
        PropertyRef,
        Function,
        Url,
        ValueList,
        DetachedRuleset,
    ],
)

# Selectors

@dataclass(frozen=True)
class Selector:
    kind: Literal["id", "class", "type", "universal"]
    name: Text

    def __post_init__(self):
        _text(self, "name")

    def __str__(self) -> str:
        if self.kind == "id":
            return f"#{self.name}"
        elif self.kind == "class":
            return f".{self.name}"
        return str(self.name)

@dataclass(frozen=True)
class MixinSelector:
    """Class or id selectors naming a mixin, outermost namespace first."""
    path: tuple[Selector, ...]

    def __post_init__(self):
        _tuple(self, "path")
        if len(self.path) == 0:
            raise ValueError("A mixin selector needs at least one selector")

    @staticmethod
    def simple(selector: Selector) -> MixinSelector:
        return MixinSelector((selector,))

    @property
    def name(self) -> Selector:
        return self.path[-1]

    def __str__(self) -> str:
        return " > ".join(str(selector) for selector in self.path)

# Items

@dataclass(frozen=True)
class Declaration:
    name: Text
    value: Value
    important: bool = False

    def __post_init__(self):
        _text(self, "name")

    def __repr__(self) -> str:
        return f"Decl({'!, ' if self.important else ''}{self.name!r}, {self.value!r})"

@dataclass(frozen=True)
class QualifiedRule:
    selector_group: tuple[Selector, ...]
    block: tuple[Item, ...] = ()

    def __post_init__(self):
        _tuple(self, "selector_group", "block")
        if len(self.selector_group) == 0:
            raise ValueError("A selector group needs at least one selector")

@dataclass(frozen=True)
class MixinDeclaration:
    selector: MixinSelector
    block: tuple[Item, ...] = ()

    def __post_init__(self):
        _tuple(self, "block")

@dataclass(frozen=True)
class MixinCall:
    selector: MixinSelector

@dataclass(frozen=True)
class VariableDeclaration:
    name: Text
    value: Value

    def __post_init__(self):
        _text(self, "name")

@dataclass(frozen=True)
class VariableCall:
    name: Text

    def __post_init__(self):
        _text(self, "name")

Item = TypeAliasType(
    "Item",
    Union[
        Declaration,
        QualifiedRule,
        MixinDeclaration,
        MixinCall,
        VariableDeclaration,
        VariableCall,
    ],
)

@dataclass(frozen=True)
class Stylesheet:
    items: tuple[Item, ...] = ()

    def __post_init__(self):
        _tuple(self, "items")

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __repr__(self) -> str:
        sep = "\n  "
        return f"""Stylesheet(
  {sep.join(repr(item) for item in self.items)}
)"""

def walk(items: Iterable[Item]):
    """Yield every item depth first, including those nested in blocks."""
    for item in items:
        yield item
        block = getattr(item, "block", None)
        if block is not None:
            yield from walk(block)
        if isinstance(item, VariableDeclaration) and isinstance(item.value, DetachedRuleset):
            yield from walk(item.value.block)
