"""Parse result algebra.

A parser run yields exactly one of two cases:

    - Success: the remaining (unconsumed) input and the parsed value
    - Failure: a ParseError, with no partial value

Design:
    - Frozen, slotted dataclasses (immutable, structurally comparable)
    - Failures are values, never raised; unwrap() is the only place a
      failure turns into an exception
    - value is present iff the case is Success

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import NoReturn

from parsecore.constants import FAILED_MESSAGE
from parsecore.diagnostics import (
    ErrorTemplate,
    ExpectedEof,
    Failed,
    ParseError,
    ParseFailedError,
    UnexpectedChar,
    UnexpectedEof,
)

__all__ = [
    "Failure",
    "ParseResult",
    "Success",
    "fail_parse",
    "fail_with_expected_eof",
    "fail_with_parse_error",
    "fail_with_unexpected_char",
    "fail_with_unexpected_eof",
    "succeed",
]


@dataclass(frozen=True, slots=True)
class Success[T]:
    """Successful parse: value plus the unconsumed suffix of the input.

    Example:
        >>> result = Success("bcd", "a")
        >>> result.value
        'a'
        >>> result.remaining
        'bcd'
        >>> str(result)
        'Result >bcd<, a'
    """

    remaining: str
    value: T

    @property
    def is_error(self) -> bool:
        """Always False for a Success."""
        return False

    @property
    def is_success(self) -> bool:
        """Always True for a Success."""
        return True

    def unwrap(self) -> T:
        """Return the parsed value."""
        return self.value

    def value_or[D](self, default: D) -> T | D:  # noqa: ARG002
        """Return the parsed value (default is ignored)."""
        return self.value

    def __str__(self) -> str:
        return ErrorTemplate.success(self.remaining, self.value)


@dataclass(frozen=True, slots=True)
class Failure:
    """Failed parse carrying a ParseError.

    Example:
        >>> result = Failure(UnexpectedEof())
        >>> result.is_error
        True
        >>> str(result)
        'Unexpected end of stream'
    """

    error: ParseError

    @property
    def is_error(self) -> bool:
        """Always True for a Failure."""
        return True

    @property
    def is_success(self) -> bool:
        """Always False for a Failure."""
        return False

    def unwrap(self) -> NoReturn:
        """Raise ParseFailedError carrying this failure's error.

        Raises:
            ParseFailedError: Always
        """
        raise ParseFailedError(self.error)

    def value_or[D](self, default: D) -> D:
        """Return default, since there is no parsed value."""
        return default

    def __str__(self) -> str:
        return self.error.description


type ParseResult[T] = Success[T] | Failure


# Convenience functions for creating ParseResult values.


def succeed[T](remaining: str, value: T) -> ParseResult[T]:
    """Build a Success with the given remaining input and value."""
    return Success(remaining, value)


def fail_with_unexpected_eof() -> Failure:
    """Build a Failure carrying UnexpectedEof."""
    return Failure(UnexpectedEof())


def fail_with_expected_eof(remaining: str) -> Failure:
    """Build a Failure carrying ExpectedEof for the given trailing input."""
    return Failure(ExpectedEof(remaining))


def fail_with_unexpected_char(char: str) -> Failure:
    """Build a Failure carrying UnexpectedChar for the given character."""
    return Failure(UnexpectedChar(char))


def fail_parse() -> Failure:
    """Build the generic Failure produced by the unconditional-failure primitive."""
    return Failure(Failed(FAILED_MESSAGE))


def fail_with_parse_error(error: ParseError) -> Failure:
    """Wrap an existing ParseError as a Failure."""
    return Failure(error)
