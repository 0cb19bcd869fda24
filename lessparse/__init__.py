from __future__ import annotations

from lessparse.errors import ParseError
from lessparse.grammar.nodes import *
from lessparse.grammar.parser import Parse, parse_stylesheet
from lessparse.options import DEFAULTS, OptionalParserOptions, ParserOptions, default_options

__version__ = "0.1.0"

""" # Scope

+ Source text in, immutable AST out:
    - Declarations, nested qualified rules
    - Variables and detached rulesets
    - Mixin declarations and calls
    - Quoted and interpolated strings

+ Left to the caller:
    - Variable resolution and mixin expansion
    - CSS output
    - Loading sources from disk
"""
