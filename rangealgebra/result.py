"""Fallible return values for the validated factories.

``Ok`` and ``Err`` are frozen dataclasses, so callers can branch with
``is_ok()`` or with structural pattern matching::

    match IntegerRange.try_from(1, 10):
        case Ok(value):
            ...
        case Err(error):
            ...
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, Literal, NoReturn, TypeVar, Union

from rangealgebra.errors import UnwrapError

T = TypeVar("T", covariant=True)
E = TypeVar("E", covariant=True)
U = TypeVar("U")
F = TypeVar("F")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful result carrying ``value``."""

    value: T

    def is_ok(self) -> Literal[True]:
        return True

    def is_err(self) -> Literal[False]:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> NoReturn:
        raise UnwrapError(f"Called unwrap_err() on an Ok value: {self.value!r}")

    def unwrap_or(self, default: Any) -> T:
        return self.value

    def map(self, fn: Callable[[T], U]) -> "Ok[U]":
        return Ok(fn(self.value))

    def map_err(self, fn: Callable[[Any], Any]) -> "Ok[T]":
        return self

    def and_then(self, fn: "Callable[[T], Result[U, F]]") -> "Result[U, F]":
        return fn(self.value)


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed result carrying ``error``."""

    error: E

    def is_ok(self) -> Literal[False]:
        return False

    def is_err(self) -> Literal[True]:
        return True

    def unwrap(self) -> NoReturn:
        raise UnwrapError(f"Called unwrap() on an Err value: {self.error}")

    def unwrap_err(self) -> E:
        return self.error

    def unwrap_or(self, default: U) -> U:
        return default

    def map(self, fn: Callable[[Any], Any]) -> "Err[E]":
        return self

    def map_err(self, fn: Callable[[E], F]) -> "Err[F]":
        return Err(fn(self.error))

    def and_then(self, fn: Callable[[Any], Any]) -> "Err[E]":
        return self


Result = Union[Ok[T], Err[E]]
