"""parsecore - a minimal parser-combinator core.

Build recursive-descent parsers over string input by combining small
primitive parsers into larger ones through a fixed algebra: map,
flat_map, skip-sequencing, alternative and repetition. Failures are
ordinary values drawn from a closed error taxonomy and surface unchanged
through arbitrarily deep composition.

Public API:
    Parser - Immutable wrapper around a parsing function
    parse - Run a parser over a complete input string
    parse_exactly - parse, additionally requiring the whole input be consumed
    Success, Failure, ParseResult - Result algebra
    UnexpectedEof, ExpectedEof, UnexpectedChar, Failed, ParseError - Error taxonomy
    succeed_with, failed, character, satisfy, char_is, eof - Primitive parsers
    map_parser, flat_map, and_then_skip, or_else - Combinators
    list_of, at_least1 - Repetition

Exceptions:
    ParsecoreError - Base exception class
    ParseFailedError - Raised by ParseResult.unwrap() on a failure

Submodules:
    parsecore.syntax.parser.rules - Derived parsers (digit, natural, space, ...)
    parsecore.chars - Character predicates and conversions
    parsecore.diagnostics - Error taxonomy and message templates
"""

from .diagnostics import (
    ErrorKind,
    ExpectedEof,
    Failed,
    ParseError,
    ParsecoreError,
    ParseFailedError,
    UnexpectedChar,
    UnexpectedEof,
)
from .syntax import Failure, ParseResult, Success, parse, parse_exactly
from .syntax.parser import (
    Parser,
    and_then_skip,
    at_least1,
    char_is,
    character,
    eof,
    failed,
    flat_map,
    list_of,
    map_parser,
    or_else,
    satisfy,
    succeed_with,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("parsecore")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ErrorKind",
    "ExpectedEof",
    "Failed",
    "Failure",
    "ParseError",
    "ParseFailedError",
    "ParseResult",
    "ParsecoreError",
    "Parser",
    "Success",
    "UnexpectedChar",
    "UnexpectedEof",
    "__version__",
    "and_then_skip",
    "at_least1",
    "char_is",
    "character",
    "eof",
    "failed",
    "flat_map",
    "list_of",
    "map_parser",
    "or_else",
    "parse",
    "parse_exactly",
    "satisfy",
    "succeed_with",
]
