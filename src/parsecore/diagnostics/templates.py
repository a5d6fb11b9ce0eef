"""Error message templates.

Centralized message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""


class ErrorTemplate:
    """Centralized error message templates.

    Every user-visible string is built here: ParseError descriptions, the
    str() form of results and the messages of exceptions raised at the API
    boundary. Keeps the wording testable in one place.
    """

    @staticmethod
    def unexpected_eof() -> str:
        """Input exhausted where a value was required."""
        return "Unexpected end of stream"

    @staticmethod
    def expected_eof(remaining: str) -> str:
        """Trailing input remained.

        Args:
            remaining: The unconsumed input

        Returns:
            Message echoing the trailing input between > and <
        """
        return f"Expected end of stream, but got >{remaining}<"

    @staticmethod
    def unexpected_char(char: str) -> str:
        """Character rejected by a predicate.

        Args:
            char: The offending character

        Returns:
            Message naming the character
        """
        return f"Unexpected character: {char}"

    @staticmethod
    def success(remaining: str, value: object) -> str:
        """Describe a successful parse result for diagnostics."""
        return f"Result >{remaining}<, {value}"

    @staticmethod
    def parse_failed(description: str) -> str:
        """Message for ParseFailedError raised at the API boundary."""
        return f"Parse failed: {description}"

    @staticmethod
    def not_callable(obj: object) -> str:
        """Parser function is not callable."""
        return f"Parser function must be callable, got {type(obj).__name__}"

    @staticmethod
    def input_not_str(obj: object) -> str:
        """Parser input is not a string."""
        return f"Parser input must be str, got {type(obj).__name__}"
