from __future__ import annotations
import sys
from typing import TypedDict

__all__ = ["ParserOptions", "OptionalParserOptions", "DEFAULTS", "default_options", "depth_ceiling"]

class ParserOptions(TypedDict):
    max_depth: int
    line_comments: bool

class OptionalParserOptions(TypedDict, total=False):
    max_depth: int
    line_comments: bool

DEFAULTS: ParserOptions = {
    # Each nested block costs several interpreter frames.
    "max_depth": 32,
    "line_comments": True,
}

# Interpreter frames one nesting level may take, with headroom for the caller's stack
FRAMES_PER_LEVEL = 20

def depth_ceiling() -> int:
    """Largest `max_depth` the current recursion limit can parse."""
    return sys.getrecursionlimit() // FRAMES_PER_LEVEL

def default_options(origin: OptionalParserOptions | dict | None = None) -> ParserOptions:
    """Fill in every option missing from `origin` with its default.

    Raises:
        ValueError: If an unknown option is given, or `max_depth` is not an int
            between 1 and `depth_ceiling()`.
    """
    origin = dict(origin or {})
    unknown = set(origin) - set(DEFAULTS)
    if unknown:
        raise ValueError(f"Unknown parser options: {', '.join(sorted(unknown))}")

    for key, value in DEFAULTS.items():
        origin[key] = origin.get(key, value)

    depth = origin["max_depth"]
    if isinstance(depth, bool) or not isinstance(depth, int) or depth < 1:
        raise ValueError(f"max_depth must be a positive integer, got {depth!r}")
    if depth > depth_ceiling():
        raise ValueError(
            f"max_depth {depth} exceeds {depth_ceiling()}, the deepest nesting "
            f"recursion limit {sys.getrecursionlimit()} allows"
        )
    return origin
