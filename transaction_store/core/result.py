"""Success/failure container returned by every repository operation."""
from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")

_UNSET: Any = object()


class ResultStateError(AssertionError):
    """Raised when the wrong side of a result is read."""


class Result(Generic[T, E]):
    """Holds either a success value or a failure error, never both.

    Build instances with :meth:`ok` or :meth:`fail`. Check ``is_success`` or
    ``is_failure`` before reading ``value`` or ``error``; reading the side that
    is not present raises :class:`ResultStateError`.
    """

    __slots__ = ("_is_success", "_value", "_error")

    def __init__(self, is_success: bool, value: Any = _UNSET, error: Any = _UNSET) -> None:
        if is_success and (value is _UNSET or error is not _UNSET):
            raise ResultStateError("A successful result must carry a value and no error")
        if not is_success and (error is _UNSET or value is not _UNSET):
            raise ResultStateError("A failed result must carry an error and no value")
        self._is_success = is_success
        self._value = value
        self._error = error

    @classmethod
    def ok(cls, value: T) -> Result[T, E]:
        return cls(True, value=value)

    @classmethod
    def fail(cls, error: E) -> Result[T, E]:
        return cls(False, error=error)

    @property
    def is_success(self) -> bool:
        return self._is_success

    @property
    def is_failure(self) -> bool:
        return not self._is_success

    @property
    def value(self) -> T:
        if not self._is_success:
            raise ResultStateError("Cannot get value from a failed result")
        return self._value

    @property
    def error(self) -> E:
        if self._is_success:
            raise ResultStateError("Cannot get error from a successful result")
        return self._error

    def get_value(self) -> T:
        return self.value

    def get_error(self) -> E:
        return self.error

    def map(self, fn: Callable[[T], U]) -> Result[U, E]:
        """Transform the success value, passing failures through untouched."""
        if self._is_success:
            return Result.ok(fn(self._value))
        return Result.fail(self._error)

    def bind(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain an operation that itself returns a result."""
        if self._is_success:
            return fn(self._value)
        return Result.fail(self._error)

    def tap(self, fn: Callable[[T], object]) -> Result[T, E]:
        if self._is_success:
            fn(self._value)
        return self

    def tap_error(self, fn: Callable[[E], object]) -> Result[T, E]:
        if not self._is_success:
            fn(self._error)
        return self

    def match(self, on_success: Callable[[T], U], on_failure: Callable[[E], U]) -> U:
        if self._is_success:
            return on_success(self._value)
        return on_failure(self._error)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return (self._is_success, self._value, self._error) == (
            other._is_success,
            other._value,
            other._error,
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._is_success:
            return f"Result.ok({self._value!r})"
        return f"Result.fail({self._error!r})"


__all__ = ["Result", "ResultStateError"]
