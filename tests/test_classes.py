"""Tests for the class-hierarchy Result and its match() method."""

import dataclasses
from unittest.mock import Mock

import pytest

from result_match.classes import Failure, Result, Success
from result_match.exceptions import UnwrapError


def test_result_is_abstract():
    with pytest.raises(TypeError):
        Result()


def test_variants_are_results():
    assert isinstance(Success(1), Result)
    assert isinstance(Failure("x"), Result)


def test_base_holds_no_state():
    assert not dataclasses.is_dataclass(Result)
    assert [f.name for f in dataclasses.fields(Success)] == ["value"]
    assert [f.name for f in dataclasses.fields(Failure)] == ["reason"]


def test_variants_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        Success(1).value = 2
    with pytest.raises(dataclasses.FrozenInstanceError):
        Failure("x").reason = "y"


def test_success_match_calls_on_success_only():
    r = Success(7)
    on_success = Mock(return_value="s")
    on_failure = Mock(return_value="f")

    assert r.match(on_success, on_failure) == "s"

    on_success.assert_called_once_with(r)
    on_failure.assert_not_called()


def test_failure_match_calls_on_failure_only():
    r = Failure("nope")
    on_success = Mock(return_value="s")
    on_failure = Mock(return_value="f")

    assert r.match(on_success, on_failure) == "f"

    on_failure.assert_called_once_with(r)
    on_success.assert_not_called()


def test_return_value_is_forwarded_unchanged():
    assert Success(5).match(lambda s: s.value * 2, lambda f: len(f.reason)) == 10
    assert Failure("bad").match(lambda s: s.value * 2, lambda f: len(f.reason)) == 3


def test_repeated_match_is_stable():
    r = Failure(("a", "b"))
    assert r.match(lambda s: 0, lambda f: len(f.reason)) == 2
    assert r.match(lambda s: 0, lambda f: len(f.reason)) == 2


def test_handler_exception_propagates_unchanged():
    boom = KeyError("boom")

    def explode(_):
        raise boom

    with pytest.raises(KeyError) as exc_info:
        Failure("x").match(lambda s: None, explode)
    assert exc_info.value is boom


def test_new_variant_must_implement_match():
    class Pending(Result):
        pass

    with pytest.raises(TypeError):
        Pending()


def test_is_success_and_is_failure():
    assert Success(1).is_success()
    assert not Success(1).is_failure()
    assert Failure("x").is_failure()
    assert not Failure("x").is_success()


def test_unwrap():
    assert Success("success").unwrap() == "success"

    with pytest.raises(UnwrapError) as exc_info:
        Failure("failure").unwrap()
    assert "failure" in str(exc_info.value)


def test_unwrap_or():
    assert Success(10).unwrap_or(20) == 10
    assert Failure("error").unwrap_or(20) == 20


def test_chaining_operations():
    """Test chaining map operations."""
    assert Success(5).map(lambda x: x * 2).map(lambda x: x + 3).unwrap() == 13


def test_error_propagation():
    """Test that failures pass through map chains untouched."""
    final = Failure("initial error").map(lambda x: x * 2).map(lambda x: x + 3)
    assert final == Failure("initial error")


def test_map_reason():
    assert Failure("failure").map_reason(lambda e: f"Error: {e}") == Failure(
        "Error: failure"
    )
    success = Success(5)
    assert success.map_reason(lambda e: f"Error: {e}") is success
