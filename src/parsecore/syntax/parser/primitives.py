"""Primitive parsers.

Parsers defined directly on the input rather than by composing other
parsers. Every primitive that reads input either consumes at least one
character or fails; none succeeds without consuming unless documented
(succeed_with, eof), which makes them safe to pass to list_of/at_least1.

Input is never mutated: a successful read returns the suffix after the
consumed character as the remaining input.
"""

from collections.abc import Callable
from typing import Any

from parsecore.constants import TODO_MESSAGE
from parsecore.diagnostics import Failed
from parsecore.syntax.result import (
    ParseResult,
    fail_parse,
    fail_with_expected_eof,
    fail_with_parse_error,
    fail_with_unexpected_char,
    fail_with_unexpected_eof,
    succeed,
)

from .core import Parser

__all__ = [
    "char_is",
    "character",
    "eof",
    "expected_eof_parser",
    "failed",
    "satisfy",
    "succeed_with",
    "todo",
    "unexpected_char_parser",
    "unexpected_eof_parser",
]


def succeed_with[T](value: T) -> Parser[T]:
    """Parser that always succeeds with value and consumes no input.

    Example:
        >>> succeed_with(2).parse("hello")
        Success(remaining='hello', value=2)
    """
    return Parser(lambda s: succeed(s, value))


def failed() -> Parser[Any]:
    """Parser that always fails with Failed("Parse failed"), consuming nothing."""
    return Parser(lambda _: fail_parse())


def todo() -> Parser[Any]:
    """Placeholder parser for grammar rules not written yet."""
    return Parser(lambda _: fail_with_parse_error(Failed(TODO_MESSAGE)))


def unexpected_char_parser(char: str) -> Parser[Any]:
    """Parser that always fails with UnexpectedChar(char)."""
    return Parser(lambda _: fail_with_unexpected_char(char))


def unexpected_eof_parser() -> Parser[Any]:
    """Parser that always fails with UnexpectedEof."""
    return Parser(lambda _: fail_with_unexpected_eof())


def expected_eof_parser(remaining: str) -> Parser[Any]:
    """Parser that always fails with ExpectedEof(remaining)."""
    return Parser(lambda _: fail_with_expected_eof(remaining))


def _read_character(s: str) -> ParseResult[str]:
    if not s:
        return fail_with_unexpected_eof()
    return succeed(s[1:], s[0])


def character() -> Parser[str]:
    """Parser that reads exactly one character.

    Fails with UnexpectedEof on empty input, otherwise succeeds with the
    first character and the rest of the input.

    Example:
        >>> character().parse("abcd")
        Success(remaining='bcd', value='a')
        >>> character().parse("")
        Failure(error=UnexpectedEof())
    """
    return Parser(_read_character)


def _check_eof(s: str) -> ParseResult[None]:
    if s:
        return fail_with_expected_eof(s)
    return succeed(s, None)


def eof() -> Parser[None]:
    """Parser that succeeds with None only at the end of input.

    Fails with ExpectedEof carrying the trailing input otherwise. Consumes
    nothing either way.
    """
    return Parser(_check_eof)


def satisfy(predicate: Callable[[str], bool]) -> Parser[str]:
    """Parser that reads one character accepted by predicate.

    Fails with UnexpectedEof on empty input (inherited from character()),
    or UnexpectedChar(c) if the character read is rejected.

    Example:
        >>> satisfy(str.isupper).parse("Abc")
        Success(remaining='bc', value='A')
        >>> satisfy(str.isupper).parse("abc")
        Failure(error=UnexpectedChar(char='a'))
    """
    return character().flat_map(
        lambda c: succeed_with(c) if predicate(c) else unexpected_char_parser(c)
    )


def char_is(expected: str) -> Parser[str]:
    """Parser that reads exactly the given character."""
    return satisfy(lambda c: c == expected)
