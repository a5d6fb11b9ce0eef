"""Repetition combinators.

list_of (zero or more) is defined through at_least1 (one or more):

    list_of(p)   = at_least1(p) | succeed_with(())
    at_least1(p) = p once, then p again on each remainder until it fails

at_least1 runs the tail iteratively, which is the unrolled form of
``p, then list_of(p) on the rest``: every further application either fails
(ending the repetition with the input left by the last success) or
consumes input. Stack depth stays constant however many elements match.

Caller obligation: p must never succeed without consuming input, otherwise
repetition does not terminate. character(), satisfy() and everything built
on them honor this.
"""

from typing import assert_never

from parsecore.syntax.result import Failure, ParseResult, Success

from .combinators import or_else
from .core import Parser
from .primitives import succeed_with

__all__ = ["at_least1", "list_of"]


def list_of[T](parser: Parser[T]) -> Parser[tuple[T, ...]]:
    """Parser producing zero or more values from parser.

    Never fails. Produces an empty tuple, consuming nothing, when parser
    fails on the first attempt.

    Example:
        >>> from parsecore.syntax.parser.primitives import character
        >>> list_of(character()).parse("abc")
        Success(remaining='', value=('a', 'b', 'c'))
        >>> list_of(character()).parse("")
        Success(remaining='', value=())
    """
    return or_else(at_least1(parser), succeed_with(()))


def at_least1[T](parser: Parser[T]) -> Parser[tuple[T, ...]]:
    """Parser producing one or more values from parser.

    Fails exactly when the first application of parser fails, with that
    error. Never partially succeeds.

    Example:
        >>> from parsecore.syntax.parser.primitives import character
        >>> at_least1(character()).parse("")
        Failure(error=UnexpectedEof())
    """

    def at_least1_impl(s: str) -> ParseResult[tuple[T, ...]]:
        match parser.run(s):
            case Success(remaining=rest, value=head):
                values = [head]
            case Failure() as failure:
                return failure
            case _ as unreachable:
                assert_never(unreachable)

        # Errors after the first match only end the repetition.
        while isinstance(result := parser.run(rest), Success):
            values.append(result.value)
            rest = result.remaining
        return Success(rest, tuple(values))

    return Parser(at_least1_impl)
