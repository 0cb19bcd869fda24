""" LESS Parser
https://lesscss.org/features/

    stylesheet   = item*
    item         = mixin-declaration | declaration | mixin-call
                 | qualified-rule | variable-declaration | variable-call
    block        = "{" item* "}"

Several items share a prefix (`.name()` starts both a mixin declaration and a
mixin call), so items are tried in a fixed order and each one commits as soon
as it has seen the token that tells it apart from the others. After the commit
a failure is a hard error for the whole parse.
"""

from __future__ import annotations
import logging

from lessparse.errors import ParseError
from lessparse.grammar.combinators import (
    HardError,
    Input,
    Matched,
    NoMatch,
    Result,
    Rule,
    alt,
    cut,
    eof,
    many0,
    mapped,
    opt,
    peek,
    sequence,
    terminated,
)
from lessparse.grammar.lexer import at_keyword, ident, parse, symbol, token
from lessparse.grammar.mixins import mixin_selector, mixin_simple_selector
from lessparse.grammar.nodes import (
    Declaration,
    DetachedRuleset,
    MixinCall,
    MixinDeclaration,
    QualifiedRule,
    Stylesheet,
    VariableCall,
    VariableDeclaration,
    Item,
    Selector,
    Value,
)
from lessparse.grammar.selectors import selector_group
from lessparse.grammar.values import declaration_value
from lessparse.options import OptionalParserOptions

__all__ = [
    "Parse",
    "parse_stylesheet",
    "stylesheet",
    "block_of_items",
    "list_of_items",
    "item",
    "declaration",
    "qualified_rule",
    "mixin_declaration",
    "mixin_call",
    "variable_declaration",
    "variable_call",
    "variable_declaration_value",
]

logger = logging.getLogger(__name__)

# `;` may be left out before a closing brace and at the end of the input
terminator: Rule = alt(
    symbol(";"),
    peek(symbol("}")),
    token(eof),
    expected="';'",
)

_bang: Rule = symbol("!")
_keyword: Rule = token(ident)

def important(input: Input) -> Result:
    """Optional `!important`, case-insensitive, trivia allowed after the `!`."""
    bang = _bang(input)
    if isinstance(bang, HardError):
        return bang
    if isinstance(bang, NoMatch):
        return Matched(False, input)

    keyword = _keyword(bang.rest)
    if isinstance(keyword, HardError):
        return keyword
    if isinstance(keyword, NoMatch):
        return NoMatch(keyword.at, "'important'")
    if str(keyword.value).lower() != "important":
        return NoMatch(keyword.rest.at(keyword.value.span[0]), "'important'")
    return Matched(True, keyword.rest)

empty_parens: Rule = sequence(symbol("("), symbol(")"))

_close_block: Rule = alt(symbol("}"), expected="an item or '}'")

def stylesheet(input: Input) -> Result:
    return mapped(list_of_items, Stylesheet)(input)

def block_of_items(input: Input) -> Result:
    """`{ item* }`. Everything after the opening brace is committed."""
    opened = symbol("{")(input)
    if not isinstance(opened, Matched):
        return opened

    limit = input.source.options["max_depth"]
    if input.depth >= limit:
        return HardError(opened.rest.advance(-1), f"at most {limit} nested blocks", "block")

    items = cut(terminated(list_of_items, _close_block), "block")(opened.rest.nested())
    if not isinstance(items, Matched):
        return items
    return Matched(items.value, input.at(items.rest.pos))

def list_of_items(input: Input) -> Result:
    return many0(item)(input)

def item(input: Input) -> Result:
    # TODO: at-rules (@media, @import) belong between qualified_rule and variable_declaration
    return _item(input)

_declaration_head: Rule = terminated(token(ident), symbol(":"))
_declaration_tail: Rule = cut(sequence(declaration_value, important, terminator), "declaration")

def declaration(input: Input) -> Result:
    head = _declaration_head(input)
    if not isinstance(head, Matched):
        return head

    tail = _declaration_tail(head.rest)
    if not isinstance(tail, Matched):
        return tail
    value, is_important, _ = tail.value
    return Matched(Declaration(head.value, value, is_important), tail.rest)

def qualified_rule(input: Input) -> Result:
    return mapped(
        sequence(selector_group, block_of_items),
        lambda parts: QualifiedRule(parts[0], parts[1]),
    )(input)

def mixin_declaration(input: Input) -> Result:
    # TODO: parameters and guards, e.g. `.m(@a; @b: 2) when (@a > 0)`
    return mapped(
        sequence(token(mixin_simple_selector), empty_parens, block_of_items),
        lambda parts: MixinDeclaration(parts[0], parts[2]),
    )(input)

_mixin_call_head: Rule = terminated(mixin_selector, empty_parens)

def mixin_call(input: Input) -> Result:
    head = _mixin_call_head(input)
    if not isinstance(head, Matched):
        return head

    end = cut(terminator, "mixin call")(head.rest)
    if not isinstance(end, Matched):
        return end
    return Matched(MixinCall(head.value), end.rest)

def detached_ruleset(input: Input) -> Result:
    return mapped(block_of_items, DetachedRuleset)(input)

variable_declaration_value: Rule = alt(detached_ruleset, declaration_value, expected="value")

_variable_head: Rule = terminated(token(at_keyword), symbol(":"))

def variable_declaration(input: Input) -> Result:
    head = _variable_head(input)
    if not isinstance(head, Matched):
        return head

    value = cut(variable_declaration_value, "variable declaration")(head.rest)
    if not isinstance(value, Matched):
        return value

    # The semicolon after a detached ruleset's closing brace is optional
    end = opt(symbol(";")) if isinstance(value.value, DetachedRuleset) else terminator
    end = cut(end, "variable declaration")(value.rest)
    if not isinstance(end, Matched):
        return end
    return Matched(VariableDeclaration(head.value, value.value), end.rest)

_variable_call_head: Rule = terminated(token(at_keyword), empty_parens)

def variable_call(input: Input) -> Result:
    head = _variable_call_head(input)
    if not isinstance(head, Matched):
        return head

    end = cut(terminator, "variable call")(head.rest)
    if not isinstance(end, Matched):
        return end
    return Matched(VariableCall(head.value), end.rest)

_item: Rule = alt(
    mixin_declaration,
    declaration,
    mixin_call,
    qualified_rule,
    variable_declaration,
    variable_call,
    expected="a declaration, rule, mixin or variable",
)

def _describe(input: Input) -> str:
    if input.at_end:
        return "end of input"
    found = ""
    for char in input.remaining:
        if char.isspace() or len(found) >= 12:
            break
        found += char
    return repr(found)

def _error(failure: NoMatch | HardError) -> ParseError:
    at = failure.at
    line, column = at.source.location(at.pos)
    rule = failure.rule if isinstance(failure, HardError) else None
    message = f"expected {failure.expected}, found {_describe(at)}"
    if rule is not None:
        message += f" (in {rule})"
    return ParseError(
        message,
        offset=at.pos,
        line=line,
        column=column,
        rule=rule,
        expected=failure.expected,
        url=at.source.url,
        source_line=at.source.line(line),
    )

class Parse:
    @staticmethod
    def run(
        rule: Rule,
        source: str,
        url: str | None = None,
        options: OptionalParserOptions | None = None,
        expected: str = "end of input",
    ):
        """Apply `rule` to all of `source`.

        Returns:
            The value `rule` produced.

        Raises:
            ParseError: If the source does not match `rule` entirely.
        """
        input = Input.of(source, options, url)
        result = parse(rule, expected)(input)
        if isinstance(result, Matched):
            return result.value

        error = _error(result)
        logger.debug(f"Parse of {url or '<input>'} failed: {error}")
        raise error

    @staticmethod
    def parse_stylesheet(
        source: str,
        url: str | None = None,
        options: OptionalParserOptions | None = None,
    ) -> Stylesheet:
        logger.debug(f"Parsing stylesheet {url or '<input>'} ({len(source)} chars)")
        result = Parse.run(
            stylesheet,
            source,
            url,
            options,
            expected="a declaration, rule, mixin or variable",
        )
        logger.debug(f"Parsed {len(result.items)} top level items from {url or '<input>'}")
        return result

    @staticmethod
    def parse_rule(source: str, options: OptionalParserOptions | None = None) -> Item:
        """Parse exactly one item."""
        return Parse.run(item, source, options=options)

    @staticmethod
    def parse_declaration(source: str, options: OptionalParserOptions | None = None) -> Declaration:
        return Parse.run(declaration, source, options=options)

    @staticmethod
    def parse_value(source: str, options: OptionalParserOptions | None = None) -> Value:
        return Parse.run(declaration_value, source, options=options)

    @staticmethod
    def parse_selector_group(
        source: str, options: OptionalParserOptions | None = None
    ) -> tuple[Selector, ...]:
        return Parse.run(selector_group, source, options=options)

parse_stylesheet = Parse.parse_stylesheet

if __name__ == "__main__":
    sheet = Parse.parse_stylesheet("""
@primary: #336699;
@title: "Hello @{name}";

.bordered() {
    border: 1px solid @primary;
}

#header, .banner {
    color: @primary !important;
    font-family: "Helvetica Neue", sans-serif;
    .bordered();
    .logo {
        background: url(images/logo.png) no-repeat;
    }
}
""")
    print(sheet)
