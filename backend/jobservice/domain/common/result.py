"""Result<T> pattern — a value or the exception that prevented computing it."""
from __future__ import annotations
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


class Result(Generic[T]):
    """
    Collapsed error channel: success carries a value, failure carries a single
    opaque cause (the exception instance). Combinators short-circuit on failure.
    """

    def __init__(self, is_success: bool, value: Optional[T] = None, error: Optional[Exception] = None):
        self.is_success = is_success
        self.value = value
        self.error = error

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        return cls(is_success=True, value=value)

    @classmethod
    def fail(cls, error: Exception) -> "Result[T]":
        return cls(is_success=False, error=error)

    @classmethod
    def of(cls, value: Any) -> "Result[Any]":
        """Lift a plain value: an exception instance becomes a failure, anything else a success."""
        if isinstance(value, Exception):
            return cls.fail(value)
        return cls.ok(value)

    @classmethod
    def catching(cls, fn: Callable[[], T]) -> "Result[T]":
        """Run ``fn`` and capture either its return value or the exception it raised."""
        try:
            return cls.ok(fn())
        except Exception as e:
            return cls.fail(e)

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    # ------------------------------------------------------------------
    # Transformations
    # ------------------------------------------------------------------
    def map(self, fn: Callable[[T], U]) -> "Result[U]":
        """Transform the success value. Exceptions raised by ``fn`` are not caught."""
        if not self.is_success:
            return Result.fail(self.error)
        return Result.ok(fn(self.value))

    def map_catching(self, fn: Callable[[T], U]) -> "Result[U]":
        """Like ``map``, but an exception raised by ``fn`` becomes a failure."""
        if not self.is_success:
            return Result.fail(self.error)
        return Result.catching(lambda: fn(self.value))

    def flat_map(self, fn: Callable[[T], "Result[U]"]) -> "Result[U]":
        if not self.is_success:
            return Result.fail(self.error)
        return fn(self.value)

    def recover(self, fn: Callable[[Exception], T]) -> "Result[T]":
        """Replace a failure with ``fn(error)``. ``fn`` may re-raise causes it does not handle."""
        if self.is_success:
            return self
        return Result.ok(fn(self.error))

    def fold(self, on_success: Callable[[T], R], on_failure: Callable[[Exception], R]) -> R:
        if self.is_success:
            return on_success(self.value)
        return on_failure(self.error)

    # ------------------------------------------------------------------
    # Extraction
    # ------------------------------------------------------------------
    def get_or_none(self) -> Optional[T]:
        return self.value if self.is_success else None

    def get_or_default(self, default: T) -> T:
        return self.value if self.is_success else default

    def get_or_throw(self) -> T:
        if not self.is_success:
            raise self.error
        return self.value

    def exception_or_none(self) -> Optional[Exception]:
        return None if self.is_success else self.error

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return (self.is_success, self.value, self.error) == (other.is_success, other.value, other.error)

    def __repr__(self) -> str:
        if self.is_success:
            return f"Result.ok({self.value!r})"
        return f"Result.fail({self.error!r})"
