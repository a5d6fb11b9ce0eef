"""Generic parser combinators.

Built purely on the Parser.run contract. Errors are never transformed:
every combinator returns the first error it meets unchanged, except
or_else, which absorbs the error of its first branch and retries the
second branch on the original input.

Monadic laws (for pure f, g and any parser p):
    map(map(p, f), g)         == map(p, compose(g, f))
    flat_map(succeed_with(a), f) == f(a)
    flat_map(p, succeed_with) == p
"""

from collections.abc import Callable
from typing import Any, assert_never

from parsecore.syntax.result import Failure, ParseResult, Success

from .core import Parser

__all__ = [
    "and_then_skip",
    "apply",
    "compose",
    "flat_map",
    "fmap",
    "map_parser",
    "or_else",
    "skip_after",
]


def map_parser[T, R](parser: Parser[T], f: Callable[[T], R]) -> Parser[R]:
    """Map any succeeding value with f.

    Consumes exactly what parser consumes. A failure is returned unchanged
    and f is not called.

    Example:
        >>> from parsecore.syntax.parser.primitives import character
        >>> map_parser(character(), str.upper).parse("abc")
        Success(remaining='bc', value='A')
    """

    def map_impl(s: str) -> ParseResult[R]:
        match parser.run(s):
            case Success(remaining=rest, value=v):
                return Success(rest, f(v))
            case Failure() as failure:
                return failure
            case _ as unreachable:
                assert_never(unreachable)

    return Parser(map_impl)


def fmap[T, R](f: Callable[[T], R], parser: Parser[T]) -> Parser[R]:
    """Function-first spelling of map_parser."""
    return map_parser(parser, f)


def flat_map[T, R](parser: Parser[T], f: Callable[[T], Parser[R]]) -> Parser[R]:
    """Run parser, then the parser f builds from its value.

    If parser fails, its error is returned and f is never called. Otherwise
    f(value) is run against the remaining input and its full result is
    returned. This is the only primitive that lets later parsing depend on
    earlier parsed values.

    Example:
        >>> from parsecore.syntax.parser.primitives import character, succeed_with
        >>> skip_one_x = flat_map(
        ...     character(), lambda c: character() if c == "x" else succeed_with(c)
        ... )
        >>> skip_one_x.parse("xabc")
        Success(remaining='bc', value='a')
    """

    def flat_map_impl(s: str) -> ParseResult[R]:
        match parser.run(s):
            case Success(remaining=rest, value=v):
                return f(v).run(rest)
            case Failure() as failure:
                return failure
            case _ as unreachable:
                assert_never(unreachable)

    return Parser(flat_map_impl)


def and_then_skip[R](first: Parser[Any], second: Parser[R]) -> Parser[R]:
    """Run first, discard its value, then run second on the rest.

    Fails with first's error if first fails, otherwise with whatever
    second produces against first's remaining input.
    """
    return flat_map(first, lambda _: second)


def skip_after[T](first: Parser[T], second: Parser[Any]) -> Parser[T]:
    """Run first then second, keeping first's value and second's remainder."""
    return flat_map(first, lambda v: map_parser(second, lambda _: v))


def or_else[T](first: Parser[T], second: Parser[T]) -> Parser[T]:
    """Try first; on any failure run second against the original input.

    Backtracking is unconditional: whatever first consumed before failing
    is invisible to second, and first's error is discarded. first must be
    pure so that re-running from the original input is safe.

    Example:
        >>> from parsecore.syntax.parser.primitives import character, succeed_with
        >>> or_else(character(), succeed_with("v")).parse("")
        Success(remaining='', value='v')
    """

    def or_else_impl(s: str) -> ParseResult[T]:
        match first.run(s):
            case Success() as success:
                return success
            case Failure():
                return second.run(s)
            case _ as unreachable:
                assert_never(unreachable)

    return Parser(or_else_impl)


def apply[T, R](parser_f: Parser[Callable[[T], R]], parser: Parser[T]) -> Parser[R]:
    """Run parser_f for a function, then parser for its argument; apply it."""
    return flat_map(parser_f, lambda f: map_parser(parser, f))


def compose[A, B, C](f: Callable[[B], C], g: Callable[[A], B]) -> Callable[[A], C]:
    """Right-to-left function composition: compose(f, g)(x) == f(g(x))."""
    return lambda x: f(g(x))
