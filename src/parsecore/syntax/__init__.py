"""Parsing package: result algebra and parser combinators.

Python 3.13+.
"""

from .parser import Parser, eof, parse
from .result import (
    Failure,
    ParseResult,
    Success,
    fail_parse,
    fail_with_expected_eof,
    fail_with_parse_error,
    fail_with_unexpected_char,
    fail_with_unexpected_eof,
    succeed,
)

__all__ = [
    "Failure",
    "ParseResult",
    "Parser",
    "Success",
    "fail_parse",
    "fail_with_expected_eof",
    "fail_with_parse_error",
    "fail_with_unexpected_char",
    "fail_with_unexpected_eof",
    "parse",
    "parse_exactly",
    "succeed",
]


def parse_exactly[T](parser: Parser[T], text: str) -> ParseResult[T]:
    """Parse text, requiring parser to consume all of it.

    Convenience function for ``parse(parser << eof(), text)``.

    Returns:
        Success with empty remaining input, or Failure. Trailing input
        yields ExpectedEof carrying it.

    Example:
        >>> from parsecore.syntax.parser import natural
        >>> parse_exactly(natural(), "42")
        Success(remaining='', value=42)
        >>> parse_exactly(natural(), "42abc")
        Failure(error=ExpectedEof(remaining='abc'))
    """
    return parse(parser << eof(), text)
