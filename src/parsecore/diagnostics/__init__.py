"""Diagnostic system for parsecore.

Provides the closed parse error taxonomy, message templates and the
exceptions raised at the API boundary.

Python 3.13+. Zero external dependencies.
"""

from .codes import (
    ErrorKind,
    ExpectedEof,
    Failed,
    ParseError,
    UnexpectedChar,
    UnexpectedEof,
)
from .errors import ParsecoreError, ParseFailedError
from .templates import ErrorTemplate

__all__ = [
    "ErrorKind",
    "ErrorTemplate",
    "ExpectedEof",
    "Failed",
    "ParseError",
    "ParseFailedError",
    "ParsecoreError",
    "UnexpectedChar",
    "UnexpectedEof",
]
