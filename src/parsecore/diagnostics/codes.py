"""Parse error taxonomy.

Defines the closed set of failure kinds a parser can report. Every failure
produced by a primitive or combinator is one of the four variants below;
combinators propagate them unchanged and never invent new kinds.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar

from .templates import ErrorTemplate

__all__ = [
    "ErrorKind",
    "ExpectedEof",
    "Failed",
    "ParseError",
    "UnexpectedChar",
    "UnexpectedEof",
]


class ErrorKind(StrEnum):
    """Discriminator for the ParseError variants.

    Inherits from ``StrEnum`` so log records and serialized diagnostics
    receive plain strings (``"unexpected_eof"``) rather than enum reprs.

    Kinds:
        UNEXPECTED_EOF: Input exhausted where a value was required
        EXPECTED_EOF: Trailing input remained when none was expected
        UNEXPECTED_CHAR: A character was read but rejected by a predicate
        FAILED: Generic, unlabeled failure
    """

    UNEXPECTED_EOF = "unexpected_eof"
    EXPECTED_EOF = "expected_eof"
    UNEXPECTED_CHAR = "unexpected_char"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class UnexpectedEof:
    """Input was exhausted where a value was required.

    Example:
        >>> str(UnexpectedEof())
        'Unexpected end of stream'
    """

    kind: ClassVar[ErrorKind] = ErrorKind.UNEXPECTED_EOF

    @property
    def description(self) -> str:
        """Human-readable description of this error."""
        return ErrorTemplate.unexpected_eof()

    def __str__(self) -> str:
        return self.description


@dataclass(frozen=True, slots=True)
class ExpectedEof:
    """Trailing input remained when the end of input was expected.

    Attributes:
        remaining: The unconsumed input

    Example:
        >>> str(ExpectedEof("abc"))
        'Expected end of stream, but got >abc<'
    """

    kind: ClassVar[ErrorKind] = ErrorKind.EXPECTED_EOF

    remaining: str

    @property
    def description(self) -> str:
        """Human-readable description of this error."""
        return ErrorTemplate.expected_eof(self.remaining)

    def __str__(self) -> str:
        return self.description


@dataclass(frozen=True, slots=True)
class UnexpectedChar:
    """A character was read but did not satisfy a predicate.

    Attributes:
        char: The offending character

    Example:
        >>> str(UnexpectedChar("a"))
        'Unexpected character: a'
    """

    kind: ClassVar[ErrorKind] = ErrorKind.UNEXPECTED_CHAR

    char: str

    @property
    def description(self) -> str:
        """Human-readable description of this error."""
        return ErrorTemplate.unexpected_char(self.char)

    def __str__(self) -> str:
        return self.description


@dataclass(frozen=True, slots=True)
class Failed:
    """Generic failure with a free-form message.

    Attributes:
        message: Reason for the failure, shown verbatim
    """

    kind: ClassVar[ErrorKind] = ErrorKind.FAILED

    message: str

    @property
    def description(self) -> str:
        """Human-readable description of this error."""
        return self.message

    def __str__(self) -> str:
        return self.description


# Closed union: no other failure kinds exist.
type ParseError = UnexpectedEof | ExpectedEof | UnexpectedChar | Failed
