"""Character classification and conversion helpers.

Plain ``str -> bool`` predicates and small converters used by the derived
parsers in :mod:`parsecore.syntax.parser.rules`. Classification follows the
Unicode database through the built-in str methods, except is_digit, which
accepts ASCII 0-9 only.

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Iterable

from parsecore.constants import NATURAL_FALLBACK

__all__ = [
    "chars_to_string",
    "is_alpha",
    "is_digit",
    "is_lower_case",
    "is_space",
    "is_upper_case",
    "parse_int_or_0",
    "to_upper",
]

logger = logging.getLogger(__name__)

# ASCII digits only. str.isdigit() accepts characters like "²" that int()
# rejects.
_ASCII_DIGITS: str = "0123456789"


def is_digit(c: str) -> bool:
    """True for ASCII decimal digits."""
    return len(c) == 1 and c in _ASCII_DIGITS


def is_upper_case(c: str) -> bool:
    """True for upper-case letters."""
    return c.isupper()


def is_lower_case(c: str) -> bool:
    """True for lower-case letters."""
    return c.islower()


def is_space(c: str) -> bool:
    """True for Unicode whitespace (space, tab, newlines, ...)."""
    return c.isspace()


def is_alpha(c: str) -> bool:
    """True for Unicode letters."""
    return c.isalpha()


def to_upper(c: str) -> str:
    """Upper-case a single character, keeping it unchanged if that would
    expand it to several characters (e.g. "ß" -> "SS").
    """
    upper = c.upper()
    return upper if len(upper) == 1 else c


def chars_to_string(chars: Iterable[str]) -> str:
    """Join a sequence of characters into a string."""
    return "".join(chars)


def parse_int_or_0(chars: Iterable[str]) -> int:
    """Convert a sequence of digit characters to an int.

    Lenient: an unparsable sequence yields NATURAL_FALLBACK (0) instead of
    an error. The fallback is logged at WARNING level so it does not pass
    silently.

    Example:
        >>> parse_int_or_0(("4", "2"))
        42
        >>> parse_int_or_0(())
        0
    """
    text = chars_to_string(chars)
    try:
        return int(text)
    except ValueError:
        logger.warning("Unparsable digit sequence %r, using %d", text, NATURAL_FALLBACK)
        return NATURAL_FALLBACK
