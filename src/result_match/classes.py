"""Class-hierarchy Result.

``Result`` is an abstract base holding no state. ``Success`` and ``Failure``
each implement :meth:`Result.match`, so dispatch happens through the variant
itself instead of by inspecting a tag.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from .exceptions import UnwrapError

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


class Result(ABC, Generic[T, E]):
    """Outcome of an operation: either a Success or a Failure."""

    __slots__ = ()

    @abstractmethod
    def match(
        self,
        on_success: Callable[["Success[T, E]"], U],
        on_failure: Callable[["Failure[T, E]"], U],
    ) -> U:
        """Call exactly one handler with this variant and return its result."""

    def is_success(self) -> bool:
        return self.match(lambda _: True, lambda _: False)

    def is_failure(self) -> bool:
        return self.match(lambda _: False, lambda _: True)

    def unwrap(self) -> T:
        """Return the success value, or raise UnwrapError for a Failure."""

        def fail(f: "Failure[T, E]"):
            raise UnwrapError(f.reason)

        return self.match(lambda s: s.value, fail)

    def unwrap_or(self, default: T) -> T:
        return self.match(lambda s: s.value, lambda _: default)

    def map(self, func: Callable[[T], U]) -> "Result[U, E]":
        return self.match(lambda s: Success(func(s.value)), lambda f: f)

    def map_reason(self, func: Callable[[E], F]) -> "Result[T, F]":
        return self.match(lambda s: s, lambda f: Failure(func(f.reason)))


@dataclass(frozen=True)
class Success(Result[T, E]):
    """Represents a successful outcome."""

    value: T

    def match(self, on_success, on_failure):
        return on_success(self)


@dataclass(frozen=True)
class Failure(Result[T, E]):
    """Represents a failed outcome."""

    reason: E

    def match(self, on_success, on_failure):
        return on_failure(self)
