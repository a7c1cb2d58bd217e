"""Tests for Ok/Err results."""

import pytest

from rangealgebra import Err, Ok, UnwrapError, ValueObjectError

ERROR = ValueObjectError(code="value_object.test.failure", message="nope")


def test_ok_accessors() -> None:
    result = Ok(3)

    assert result.is_ok()
    assert not result.is_err()
    assert result.unwrap() == 3
    assert result.unwrap_or(0) == 3
    with pytest.raises(UnwrapError):
        result.unwrap_err()


def test_err_accessors() -> None:
    result = Err(ERROR)

    assert result.is_err()
    assert not result.is_ok()
    assert result.unwrap_err() is ERROR
    assert result.unwrap_or(0) == 0
    with pytest.raises(UnwrapError, match="value_object.test.failure"):
        result.unwrap()


def test_map_and_then_short_circuit_on_err() -> None:
    assert Ok(2).map(lambda v: v * 10) == Ok(20)
    assert Ok(2).and_then(lambda v: Err(ERROR)) == Err(ERROR)
    assert Err(ERROR).map(lambda v: v * 10) == Err(ERROR)
    assert Err(ERROR).and_then(lambda v: Ok(v)) == Err(ERROR)
    assert Err(ERROR).map_err(lambda e: e.code) == Err("value_object.test.failure")
    assert Ok(1).map_err(lambda e: e.code) == Ok(1)


def test_pattern_matching() -> None:
    match Err(ERROR):
        case Ok(value):
            pytest.fail(f"unexpected Ok({value})")
        case Err(error):
            assert error.code == "value_object.test.failure"


def test_error_value_rendering() -> None:
    assert str(ERROR) == "value_object.test.failure: nope"
    assert ERROR.to_dict() == {"code": "value_object.test.failure", "message": "nope"}
