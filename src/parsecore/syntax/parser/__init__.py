"""Parser combinator package.

Modules:
    core: Parser type and the parse() entry point
    primitives: Parsers defined directly on the input
    combinators: map, flat_map, skip and alternative
    repetition: list_of / at_least1
    rules: Derived parsers (digit, natural, space, ...)
"""

from .combinators import (
    and_then_skip,
    apply,
    compose,
    flat_map,
    fmap,
    map_parser,
    or_else,
    skip_after,
)
from .core import Parser, parse
from .primitives import (
    char_is,
    character,
    eof,
    expected_eof_parser,
    failed,
    satisfy,
    succeed_with,
    todo,
    unexpected_char_parser,
    unexpected_eof_parser,
)
from .repetition import at_least1, list_of
from .rules import alpha, digit, lower, natural, space, spaces, upper

__all__ = [
    "Parser",
    "alpha",
    "and_then_skip",
    "apply",
    "at_least1",
    "char_is",
    "character",
    "compose",
    "digit",
    "eof",
    "expected_eof_parser",
    "failed",
    "flat_map",
    "fmap",
    "list_of",
    "lower",
    "map_parser",
    "natural",
    "or_else",
    "parse",
    "satisfy",
    "skip_after",
    "space",
    "spaces",
    "succeed_with",
    "todo",
    "unexpected_char_parser",
    "unexpected_eof_parser",
    "upper",
]
