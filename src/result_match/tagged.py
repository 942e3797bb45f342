"""Tagged-union Result.

Each variant carries a ``tag`` discriminant next to its payload, and the
standalone :func:`result` function dispatches on that tag::

    def divide(a: float, b: float) -> Result[float, str]:
        if b == 0:
            return Failure("division by zero")
        return Success(a / b)

    text = result(
        divide(10, 2),
        lambda s: f"got {s.value}",
        lambda f: f"failed: {f.reason}",
    )
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Generic, TypeVar, Union

from .exceptions import MalformedResultError, UnwrapError

logger = logging.getLogger(__name__)

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


class Tag(str, Enum):
    """Discriminant of a tagged Result."""

    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class Success(Generic[T]):
    """Represents a successful outcome."""

    value: T
    tag: Tag = field(default=Tag.SUCCESS, init=False)


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Represents a failed outcome."""

    reason: E
    tag: Tag = field(default=Tag.FAILURE, init=False)


Result = Union[Success[T], Failure[E]]


def result(
    r: Result[T, E],
    on_success: Callable[[Success[T]], U],
    on_failure: Callable[[Failure[E]], U],
) -> U:
    """
    Dispatch on the tag of ``r``.

    Calls ``on_success(r)`` for a success tag or ``on_failure(r)`` for a
    failure tag, exactly once, and returns whatever that handler returns.
    Exceptions raised by the handler propagate unchanged.

    Raises:
        MalformedResultError: ``r`` has no tag, or a tag outside ``Tag``.
            Neither handler is called.
    """
    tag = getattr(r, "tag", None)
    if tag == Tag.SUCCESS:
        return on_success(r)  # type: ignore[arg-type]
    if tag == Tag.FAILURE:
        return on_failure(r)  # type: ignore[arg-type]

    error = MalformedResultError(r, tag)
    logger.error(f"Refusing to dispatch: {error}")
    raise error


def is_success(r: Result[Any, Any]) -> bool:
    return result(r, lambda _: True, lambda _: False)


def is_failure(r: Result[Any, Any]) -> bool:
    return result(r, lambda _: False, lambda _: True)


def _raise_unwrap(f: Failure[Any]):
    raise UnwrapError(f.reason)


def unwrap(r: Result[T, Any]) -> T:
    """Return the success value, or raise UnwrapError for a Failure."""
    return result(r, lambda s: s.value, _raise_unwrap)


def unwrap_or(r: Result[T, Any], default: T) -> T:
    return result(r, lambda s: s.value, lambda _: default)


def map_value(r: Result[T, E], func: Callable[[T], U]) -> Result[U, E]:
    """Apply ``func`` to a success value; a Failure is returned as is."""
    return result(r, lambda s: Success(func(s.value)), lambda f: f)


def map_reason(r: Result[T, E], func: Callable[[E], F]) -> Result[T, F]:
    """Apply ``func`` to a failure reason; a Success is returned as is."""
    return result(r, lambda s: s, lambda f: Failure(func(f.reason)))
