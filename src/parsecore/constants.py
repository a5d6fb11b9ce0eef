"""Shared constants for parsecore.

Centralized configuration used across the diagnostics, syntax and derived
parser modules. Placing constants here avoids circular imports and provides
a single source of truth.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Failure messages
    "FAILED_MESSAGE",
    "TODO_MESSAGE",
    # Derived parser policy
    "NATURAL_FALLBACK",
    # Logging
    "LOG_PREVIEW_LENGTH",
]

# ============================================================================
# FAILURE MESSAGES
# ============================================================================

# Message carried by Failed errors from the unconditional-failure primitive.
FAILED_MESSAGE: str = "Parse failed"

# Message carried by the placeholder parser used while sketching a grammar.
TODO_MESSAGE: str = "*** TODO ***"

# ============================================================================
# DERIVED PARSER POLICY
# ============================================================================

# Value produced when a digit sequence cannot be converted to an integer.
# Lenient by choice: natural() never fails after matching digits.
NATURAL_FALLBACK: int = 0

# ============================================================================
# LOGGING
# ============================================================================

# Maximum number of input characters echoed in DEBUG log records.
LOG_PREVIEW_LENGTH: int = 50
