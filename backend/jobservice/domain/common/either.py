"""Either<E, T> pattern: a value or one of a closed set of typed errors."""
from __future__ import annotations
from typing import Any, Callable, Generic, Optional, TypeVar

E = TypeVar("E")
T = TypeVar("T")
U = TypeVar("U")
F = TypeVar("F")
R = TypeVar("R")


class Either(Generic[E, T]):
    """
    Discriminated error channel. ``left`` holds an error variant, ``right`` holds
    the success value. Every failure is an explicit value; nothing is raised.
    """

    def __init__(self, is_right: bool, left_value: Optional[E] = None, right_value: Optional[T] = None):
        self.is_right = is_right
        self.left_value = left_value
        self.right_value = right_value

    @classmethod
    def left(cls, error: E) -> "Either[E, T]":
        return cls(is_right=False, left_value=error)

    @classmethod
    def right(cls, value: T) -> "Either[E, T]":
        return cls(is_right=True, right_value=value)

    @classmethod
    def catch(cls, fn: Callable[[], T]) -> "Either[Exception, T]":
        """Run ``fn`` at an I/O edge; the caller is expected to ``map_left`` the exception."""
        try:
            return cls.right(fn())
        except Exception as e:
            return cls.left(e)

    @property
    def is_left(self) -> bool:
        return not self.is_right

    def map(self, fn: Callable[[T], U]) -> "Either[E, U]":
        if not self.is_right:
            return Either.left(self.left_value)
        return Either.right(fn(self.right_value))

    def map_left(self, fn: Callable[[E], F]) -> "Either[F, T]":
        if self.is_right:
            return Either.right(self.right_value)
        return Either.left(fn(self.left_value))

    def flat_map(self, fn: Callable[[T], "Either[E, U]"]) -> "Either[E, U]":
        if not self.is_right:
            return Either.left(self.left_value)
        return fn(self.right_value)

    def fold(self, on_left: Callable[[E], R], on_right: Callable[[T], R]) -> R:
        if self.is_right:
            return on_right(self.right_value)
        return on_left(self.left_value)

    def get_or_none(self) -> Optional[T]:
        return self.right_value if self.is_right else None

    def get_or_else(self, fn: Callable[[E], T]) -> T:
        return self.right_value if self.is_right else fn(self.left_value)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Either):
            return NotImplemented
        return (self.is_right, self.left_value, self.right_value) == (
            other.is_right,
            other.left_value,
            other.right_value,
        )

    def __repr__(self) -> str:
        if self.is_right:
            return f"Either.right({self.right_value!r})"
        return f"Either.left({self.left_value!r})"
