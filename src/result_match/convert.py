"""Conversion between the tagged and class-hierarchy encodings.

Payloads are carried over by identity, so converting there and back yields
an equal value.
"""

from typing import TypeVar

from . import classes, tagged

T = TypeVar("T")
E = TypeVar("E")


def to_tagged(r: classes.Result[T, E]) -> tagged.Result[T, E]:
    return r.match(
        lambda s: tagged.Success(s.value),
        lambda f: tagged.Failure(f.reason),
    )


def from_tagged(r: tagged.Result[T, E]) -> classes.Result[T, E]:
    """Convert a tagged Result; malformed input raises MalformedResultError."""
    return tagged.result(
        r,
        lambda s: classes.Success(s.value),
        lambda f: classes.Failure(f.reason),
    )
