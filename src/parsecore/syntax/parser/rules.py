"""Derived parsers.

Small grammar rules built by applying the combinator and repetition layers
to the character predicates in :mod:`parsecore.chars`. They double as
worked examples of composing the core.
"""

from parsecore.chars import (
    chars_to_string,
    is_alpha,
    is_digit,
    is_lower_case,
    is_space,
    is_upper_case,
    parse_int_or_0,
)

from .core import Parser
from .primitives import satisfy
from .repetition import at_least1

__all__ = [
    "alpha",
    "digit",
    "lower",
    "natural",
    "space",
    "spaces",
    "upper",
]


def digit() -> Parser[str]:
    """Parser for one ASCII digit character (not its numeric value)."""
    return satisfy(is_digit)


def natural() -> Parser[int]:
    """Parser for a non-negative integer written as one or more digits.

    Fails with UnexpectedEof on empty input or UnexpectedChar when the input
    does not start with a digit.

    Example:
        >>> natural().parse("42abc")
        Success(remaining='abc', value=42)
    """
    return at_least1(digit()).map(parse_int_or_0)


def space() -> Parser[str]:
    """Parser for one whitespace character."""
    return satisfy(is_space)


def spaces() -> Parser[str]:
    """Parser for one or more whitespace characters, joined into a string."""
    return at_least1(space()).map(chars_to_string)


def lower() -> Parser[str]:
    """Parser for one lower-case character."""
    return satisfy(is_lower_case)


def upper() -> Parser[str]:
    """Parser for one upper-case character."""
    return satisfy(is_upper_case)


def alpha() -> Parser[str]:
    """Parser for one alphabetic character."""
    return satisfy(is_alpha)
