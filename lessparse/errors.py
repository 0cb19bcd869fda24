from __future__ import annotations
from conterm.pretty import Markup

__all__ = ["ParseError"]

class ParseError(Exception):
    """A stylesheet could not be parsed.

    Raised exactly once per failed parse; no partial AST accompanies it.

    Attributes:
        message (str): Human readable description of the failure.
        rule (str | None): Name of the grammar rule that committed before failing,
            `None` when no rule matched at all.
        expected (str | None): What the parser expected at `offset`.
        offset (int): Character offset into the source.
        line (int): 1-based line of `offset`.
        column (int): 1-based column of `offset`.
        url (str | None): Where the source came from, if the caller said so.
    """

    def __init__(
        self,
        message: str,
        *,
        offset: int,
        line: int,
        column: int,
        rule: str | None = None,
        expected: str | None = None,
        url: str | None = None,
        source_line: str = "",
    ) -> None:
        self.message = message
        self.offset = offset
        self.line = line
        self.column = column
        self.rule = rule
        self.expected = expected
        self.url = url
        self.source_line = source_line
        super().__init__(f"{self.location}: {message}")

    @property
    def location(self) -> str:
        return f"{self.url or '<input>'}:{self.line}:{self.column}"

    def pretty(self) -> str:
        """Render the error for a terminal: message, location and a caret under
        the offending column of the source line.
        """
        gutter = " " * len(str(self.line))
        lines = [
            Markup.parse("[red]error") + f": {self.message}",
            gutter + Markup.parse("[blue]-->") + f" {self.location}",
        ]
        if self.source_line:
            lines.append(Markup.parse(f"[blue]{self.line} |") + f" {self.source_line}")
            caret = " " * (self.column - 1) + Markup.parse("[red]^")
            lines.append(gutter + Markup.parse("[blue] |") + " " + caret)
        return "\n".join(lines)
