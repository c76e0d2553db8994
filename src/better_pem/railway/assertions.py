"""
Test assertions for Result values.

Provides expressive assert methods that produce clear failure messages.

Usage in tests:
    from better_pem.railway import ResultAssertions

    def test_bundle_parses():
        pems = ResultAssertions.assert_success(parse_pems(bundle))
        assert pems.remaining_count() == 3

    def test_csr_only_is_rejected():
        error = ResultAssertions.assert_failure(
            parse_pems(csr_pem), ErrorCode.NO_RECOGNIZED_PEM_BLOCKS
        )
"""

from __future__ import annotations

from typing import Any, TypeVar

from better_pem.railway.failure import ErrorCode, FailureDescription
from better_pem.railway.result import Result

T = TypeVar("T")
E = TypeVar("E", bound=BaseException)


class ResultAssertions:
    """Expressive test assertions for Result values."""

    @staticmethod
    def assert_success(result: Result[T], message: str = "") -> T:
        """
        Assert the Result is a Success and return the value.

            pems = ResultAssertions.assert_success(result)
        """
        context = f" — {message}" if message else ""
        assert result.is_success(), (
            f"Expected Success but got Failure("
            f"{result.error().code.value}: {result.error().message!r}){context}"
        )
        return result.value()

    @staticmethod
    def assert_failure(
        result: Result[T],
        expected_code: ErrorCode | None = None,
        message: str = "",
    ) -> FailureDescription:
        """
        Assert the Result is a Failure, optionally checking the error code.

            error = ResultAssertions.assert_failure(result, ErrorCode.BLOCK_PARSE_FAILURE)
        """
        context = f" — {message}" if message else ""
        assert result.is_failure(), (
            f"Expected Failure but got Success({result.value()!r}){context}"
        )
        error = result.error()
        if expected_code is not None:
            assert error.code == expected_code, (
                f"Expected error code {expected_code.value} "
                f"but got {error.code.value}: {error.message!r}{context}"
            )
        return error

    @staticmethod
    def assert_failure_exception(result: Result[T], expected_type: type[E]) -> E:
        """
        Assert the Result is a Failure carrying an exception of the given type.

            exc = ResultAssertions.assert_failure_exception(result, BlockParseFailure)
            assert exc.block_type == "CERTIFICATE"
        """
        error = ResultAssertions.assert_failure(result)
        assert isinstance(error.exception, expected_type), (
            f"Expected failure exception of type {expected_type.__name__} "
            f"but got {type(error.exception).__name__}: {error.message!r}"
        )
        return error.exception

    @staticmethod
    def assert_failure_message_contains(result: Result[T], substring: str) -> None:
        """Assert that the failure message contains the given substring (case-insensitive)."""
        assert result.is_failure(), (
            f"Expected Failure but got Success({result.value()!r})"
        )
        error = result.error()
        assert substring.lower() in error.message.lower(), (
            f"Expected failure message to contain {substring!r} "
            f"but message was: {error.message!r}"
        )

    @staticmethod
    def assert_success_value(result: Result[T], expected_value: Any) -> None:
        """Assert the Result is a Success with the specific value."""
        value = ResultAssertions.assert_success(result)
        assert value == expected_value, (
            f"Expected success value {expected_value!r} but got {value!r}"
        )
