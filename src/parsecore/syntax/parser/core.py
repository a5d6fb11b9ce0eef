"""Core parser abstraction.

A Parser[T] wraps a pure function from input text to ParseResult[T]. It is
immutable and reusable: running it twice on the same input yields equal
results, and composing it never copies or mutates it. Combinators build new
Parser values that close over the parsers they combine.

Architecture:
    - :mod:`~parsecore.syntax.parser.primitives` - parsers defined directly on
      the input (character, satisfy, succeed_with, failed, eof)
    - :mod:`~parsecore.syntax.parser.combinators` - map, flat_map, skip and
      alternative, built only on Parser.run
    - :mod:`~parsecore.syntax.parser.repetition` - list_of / at_least1

The operator methods below delegate to the combinator layer:

    p.map(f)        map_parser(p, f)
    p.flat_map(f)   flat_map(p, f)
    p >> q          and_then_skip(p, q)   keep q's value
    p << q          skip_after(p, q)      keep p's value
    p | q           or_else(p, q)
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from parsecore.constants import LOG_PREVIEW_LENGTH
from parsecore.diagnostics import ErrorTemplate

if TYPE_CHECKING:
    from parsecore.syntax.result import ParseResult

__all__ = ["Parser", "parse"]

logger = logging.getLogger(__name__)


def _preview(text: str) -> str:
    """Truncate input for log records."""
    if len(text) <= LOG_PREVIEW_LENGTH:
        return text
    return text[:LOG_PREVIEW_LENGTH] + "..."


@dataclass(frozen=True, slots=True)
class Parser[T]:
    """Immutable wrapper around a parsing function.

    Attributes:
        run: Function from input text to ParseResult[T]. Must be pure:
            no I/O, no shared mutable state, deterministic.

    Example:
        >>> from parsecore.syntax.result import Success
        >>> p = Parser(lambda s: Success(s, 2))
        >>> p.parse("hello")
        Success(remaining='hello', value=2)
    """

    run: Callable[[str], ParseResult[T]]

    def __post_init__(self) -> None:
        if not callable(self.run):
            raise TypeError(ErrorTemplate.not_callable(self.run))

    def parse(self, text: str) -> ParseResult[T]:
        """Run this parser over a complete input string.

        Equivalent to ``parse(self, text)``.
        """
        return parse(self, text)

    def map[R](self, f: Callable[[T], R]) -> Parser[R]:
        """Transform the parsed value with f; failures pass through unchanged."""
        from .combinators import map_parser  # noqa: PLC0415 - circular

        return map_parser(self, f)

    def flat_map[R](self, f: Callable[[T], Parser[R]]) -> Parser[R]:
        """Feed the parsed value to f and run the resulting parser on the rest."""
        from .combinators import flat_map  # noqa: PLC0415 - circular

        return flat_map(self, f)

    def __rshift__[R](self, other: Parser[R]) -> Parser[R]:
        from .combinators import and_then_skip  # noqa: PLC0415 - circular

        return and_then_skip(self, other)

    def __lshift__(self, other: Parser[Any]) -> Parser[T]:
        from .combinators import skip_after  # noqa: PLC0415 - circular

        return skip_after(self, other)

    def __or__(self, other: Parser[T]) -> Parser[T]:
        from .combinators import or_else  # noqa: PLC0415 - circular

        return or_else(self, other)


def parse[T](parser: Parser[T], text: str) -> ParseResult[T]:
    """Run a parser over a complete input string.

    This is the sole entry point of the library: given any built parser and
    an input string, produce either a Success (value and unconsumed
    remainder) or a Failure (typed error). Failures are returned, not
    raised.

    Args:
        parser: Parser to run
        text: Complete input

    Returns:
        ParseResult of running parser over text

    Raises:
        TypeError: If text is not a str

    Example:
        >>> from parsecore.syntax.parser.primitives import character
        >>> parse(character(), "abcd")
        Success(remaining='bcd', value='a')
    """
    if not isinstance(text, str):
        raise TypeError(ErrorTemplate.input_not_str(text))

    logger.debug("Parsing %d characters: %r", len(text), _preview(text))
    result = parser.run(text)
    if result.is_error:
        logger.debug("Parse failed: %s", result)
    else:
        logger.debug("Parse succeeded with %d characters remaining", len(result.remaining))
    return result
