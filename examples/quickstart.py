"""Quickstart example for parsecore.

Builds a few parsers from the primitives and combinators and prints the
results, including how failures surface.
"""

from parsecore import (
    at_least1,
    char_is,
    character,
    list_of,
    parse,
    parse_exactly,
    succeed_with,
)
from parsecore.syntax.parser.rules import natural, spaces, upper

# Example 1: Single characters
print("=" * 50)
print("Example 1: Single Characters")
print("=" * 50)

print(parse(character(), "abcd"))
# Output: Result >bcd<, a

print(parse(character(), ""))
# Output: Unexpected end of stream

# Example 2: Alternatives and repetition
print("\n" + "=" * 50)
print("Example 2: Alternatives and Repetition")
print("=" * 50)

print(parse(character() | succeed_with("v"), ""))
# Output: Result ><, v

print(parse(list_of(character()), "abc"))
# Output: Result ><, ('a', 'b', 'c')

print(parse(at_least1(upper()), "abc"))
# Output: Unexpected character: a

# Example 3: A tiny grammar - comma separated naturals
print("\n" + "=" * 50)
print("Example 3: Comma Separated Naturals")
print("=" * 50)

separator = char_is(",") >> (spaces() | succeed_with(""))
numbers = natural().flat_map(
    lambda first: list_of(separator >> natural()).map(lambda rest: (first, *rest))
)

print(parse_exactly(numbers, "1, 22,333"))
# Output: Result ><, (1, 22, 333)

print(parse_exactly(numbers, "1, 22;333"))
# Output: Expected end of stream, but got >;333<

# Example 4: Raising at the boundary
print("\n" + "=" * 50)
print("Example 4: unwrap()")
print("=" * 50)

total = sum(parse_exactly(numbers, "4,5,6").unwrap())
print(total)
# Output: 15

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
