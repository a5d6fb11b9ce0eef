"""Tests for the parse result algebra."""

from __future__ import annotations

import pytest

from parsecore.diagnostics import (
    ExpectedEof,
    Failed,
    ParseFailedError,
    UnexpectedChar,
    UnexpectedEof,
)
from parsecore.syntax.result import (
    Failure,
    Success,
    fail_parse,
    fail_with_expected_eof,
    fail_with_parse_error,
    fail_with_unexpected_char,
    fail_with_unexpected_eof,
    succeed,
)

# ============================================================================
# CONSTRUCTORS
# ============================================================================


class TestResultConstructors:
    """Convenience constructors build the expected cases."""

    def test_succeed(self) -> None:
        assert succeed("rest", 1) == Success("rest", 1)

    def test_fail_with_unexpected_eof(self) -> None:
        assert fail_with_unexpected_eof() == Failure(UnexpectedEof())

    def test_fail_with_expected_eof(self) -> None:
        assert fail_with_expected_eof("tail") == Failure(ExpectedEof("tail"))

    def test_fail_with_unexpected_char(self) -> None:
        assert fail_with_unexpected_char("z") == Failure(UnexpectedChar("z"))

    def test_fail_parse(self) -> None:
        assert fail_parse() == Failure(Failed("Parse failed"))

    def test_fail_with_parse_error(self) -> None:
        assert fail_with_parse_error(Failed("custom")) == Failure(Failed("custom"))


# ============================================================================
# CASE DISCRIMINATION
# ============================================================================


class TestResultCases:
    """Exactly one case holds; value only exists for Success."""

    def test_success_flags(self) -> None:
        result = Success("", "a")

        assert result.is_success
        assert not result.is_error

    def test_failure_flags(self) -> None:
        result = Failure(UnexpectedEof())

        assert result.is_error
        assert not result.is_success

    def test_failure_has_no_value(self) -> None:
        result = Failure(UnexpectedEof())

        assert not hasattr(result, "value")

    def test_results_are_immutable(self) -> None:
        result = Success("bc", "a")

        with pytest.raises(AttributeError):
            result.value = "b"  # type: ignore[misc]


class TestResultEquality:
    """Equal iff same case and equal fields."""

    def test_success_equal(self) -> None:
        assert Success("bc", ("a",)) == Success("bc", ("a",))

    def test_success_differs_on_remaining(self) -> None:
        assert Success("bc", "a") != Success("c", "a")

    def test_success_differs_on_value(self) -> None:
        assert Success("bc", "a") != Success("bc", "b")

    def test_failure_equal(self) -> None:
        assert Failure(UnexpectedChar("a")) == Failure(UnexpectedChar("a"))

    def test_failure_differs_on_payload(self) -> None:
        assert Failure(UnexpectedChar("a")) != Failure(UnexpectedChar("b"))

    def test_success_never_equals_failure(self) -> None:
        assert Success("", None) != Failure(UnexpectedEof())


# ============================================================================
# DIAGNOSTICS AND UNWRAPPING
# ============================================================================


class TestResultDescription:
    """str() describes each case."""

    def test_success_description(self) -> None:
        assert str(Success("bcd", "a")) == "Result >bcd<, a"

    def test_failure_description(self) -> None:
        assert str(Failure(UnexpectedChar("a"))) == "Unexpected character: a"


class TestUnwrap:
    """unwrap() is the only place failures become exceptions."""

    def test_success_unwrap(self) -> None:
        assert Success("", 42).unwrap() == 42

    def test_failure_unwrap_raises(self) -> None:
        with pytest.raises(ParseFailedError) as exc_info:
            Failure(UnexpectedEof()).unwrap()

        assert exc_info.value.error == UnexpectedEof()

    def test_value_or_success(self) -> None:
        assert Success("", 1).value_or(0) == 1

    def test_value_or_failure(self) -> None:
        assert Failure(UnexpectedEof()).value_or(0) == 0
