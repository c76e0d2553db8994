"""
Result monad — the core of Railway-Oriented Programming.

A Result[T] is either Success(value: T) or Failure(error: FailureDescription).
Every stage of parse_pems returns a Result; errors propagate through the
failure track via .flat_map() short-circuiting.

    ┌───────────┐   flat_map    ┌──────────────┐
    │ normalize │──Success──────│ demultiplex  │──→ Result[ParsedPems]
    └─────┬─────┘               └──────┬───────┘
          │ Failure                    │ Failure
          └────────────────────────────┴──→ Result[ParsedPems]

Callers branch with match/case, or leave the railway with get_or_raise().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from better_pem.railway.failure import ErrorCode, FailureDescription

T = TypeVar("T")
U = TypeVar("U")


class Result(Generic[T]):
    """
    Railway-Oriented Programming Result monad.

        match parse_pems(bundle):
            case Success(pems):
                cert = pems.take_certificate()
            case Failure(err) if err.code is ErrorCode.NO_RECOGNIZED_PEM_BLOCKS:
                ...
    """

    def is_success(self) -> bool:
        return isinstance(self, Success)

    def is_failure(self) -> bool:
        return isinstance(self, Failure)

    def value(self) -> T:
        """Extract the success value. Raises ValueError if called on a Failure."""
        match self:
            case Success(v):
                return v
            case Failure(err):
                raise ValueError(f"Cannot get value from a Failure: {err.message}")
        raise TypeError("unreachable")  # pragma: no cover

    def error(self) -> FailureDescription:
        """Extract the failure description. Raises ValueError if called on a Success."""
        match self:
            case Failure(err):
                return err
            case Success(v):
                raise ValueError(f"Cannot get error from a Success: {v}")
        raise TypeError("unreachable")  # pragma: no cover

    def flat_map(self, mapper: Callable[[T], Result[U]]) -> Result[U]:
        """
        Chain a Result-returning function. Short-circuits on failure.

            normalizer.normalize(source).flat_map(demultiplexer.parse_all)
        """
        match self:
            case Success(v):
                return mapper(v)
            case Failure(err):
                return Failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    def get_or_raise(self) -> T:
        """
        Extract value or raise the exception attached to the failure.

            pems = parse_pems(data).get_or_raise()  # may raise BlockParseFailure, ...

        A failure without an attached exception raises ValueError.
        """
        match self:
            case Success(v):
                return v
            case Failure(err):
                if err.exception is not None:
                    raise err.exception
                raise ValueError(err.message)
        raise TypeError("unreachable")  # pragma: no cover

    @staticmethod
    def success(value: T) -> Result[T]:
        return Success(value)

    @staticmethod
    def failure(
        code: ErrorCode,
        message: str,
        exception: Optional[BaseException] = None,
    ) -> Result[T]:
        return Failure(FailureDescription(code=code, message=message, exception=exception))

    def __bool__(self) -> bool:
        """`if result: ...` succeeds only on Success."""
        return self.is_success()


@dataclass(frozen=True, slots=True)
class Success(Result[T]):
    """The success track — wraps a value of type T."""

    _value: T

    def __init__(self, value: T) -> None:
        if value is None:
            raise TypeError("Success value must not be None")
        object.__setattr__(self, "_value", value)

    def __repr__(self) -> str:
        return f"Success({self._value!r})"


# Enable structural pattern matching: case Success(value)
Success.__match_args__ = ("_value",)


@dataclass(frozen=True, slots=True)
class Failure(Result[T]):
    """The failure track — wraps a FailureDescription."""

    _error: FailureDescription

    def __init__(self, error: FailureDescription) -> None:
        if error is None:
            raise TypeError("Failure error must not be None")
        object.__setattr__(self, "_error", error)

    def __repr__(self) -> str:
        return f"Failure({self._error.code.value}: {self._error.message!r})"


# Enable structural pattern matching: case Failure(error)
Failure.__match_args__ = ("_error",)
