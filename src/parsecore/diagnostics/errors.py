"""parsecore exception hierarchy.

Parse failures are ordinary values (see parsecore.syntax.result). The
exceptions below exist only at the API boundary, for callers that prefer
to raise on failure via ParseResult.unwrap().

Python 3.13+. Zero external dependencies.
"""

from .codes import ParseError
from .templates import ErrorTemplate

__all__ = ["ParseFailedError", "ParsecoreError"]


class ParsecoreError(Exception):
    """Base exception for all parsecore errors."""


class ParseFailedError(ParsecoreError):
    """A parse result was unwrapped but holds a failure.

    Attributes:
        error: The ParseError carried by the failed result
    """

    def __init__(self, error: ParseError) -> None:
        """Initialize ParseFailedError.

        Args:
            error: The ParseError carried by the failed result
        """
        self.error = error
        super().__init__(ErrorTemplate.parse_failed(error.description))
