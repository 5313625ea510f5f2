"""Algebraic laws shared by Option and Result."""

import pytest

from optres import NONE, Err, Ok, Option, Result, Some

OPTIONS: list[Option[int]] = [Some(0), Some(7), NONE]
RESULTS: list[Result[int, str]] = [Ok(0), Ok(7), Err("boom")]


def _half(x: int) -> Option[int]:
    return Some(x // 2) if x % 2 == 0 else NONE


def _positive(x: int) -> Option[int]:
    return Some(x) if x > 0 else NONE


def _checked_half(x: int) -> Result[int, str]:
    return Ok(x // 2) if x % 2 == 0 else Err("odd")


def _checked_positive(x: int) -> Result[int, str]:
    return Ok(x) if x > 0 else Err("not positive")


@pytest.mark.parametrize("option", OPTIONS)
def test_option_variants_are_exclusive(option: Option[int]) -> None:
    """Exactly one of is_some and is_none holds."""
    assert option.is_some() != option.is_none()


@pytest.mark.parametrize("result", RESULTS)
def test_result_variants_are_exclusive(result: Result[int, str]) -> None:
    """Exactly one of is_ok and is_err holds."""
    assert result.is_ok() != result.is_err()


@pytest.mark.parametrize("option", OPTIONS)
def test_option_identity(option: Option[int]) -> None:
    """Chaining into Some, or mapping the identity, changes nothing."""
    assert option.and_then(Some) == option
    assert option.map(lambda x: x) == option


@pytest.mark.parametrize("result", RESULTS)
def test_result_identity(result: Result[int, str]) -> None:
    """Chaining into Ok changes nothing."""
    assert result.and_then(Ok) == result


@pytest.mark.parametrize("value", [0, 2, 3, 8, -4])
def test_option_associativity(value: int) -> None:
    """Nesting and_then calls does not matter."""
    left = Some(value).and_then(_half).and_then(_positive)
    right = Some(value).and_then(lambda x: _half(x).and_then(_positive))
    assert left == right


@pytest.mark.parametrize("value", [0, 2, 3, 8, -4])
def test_result_associativity(value: int) -> None:
    """Nesting and_then calls does not matter."""
    left = Ok(value).and_then(_checked_half).and_then(_checked_positive)
    right = Ok(value).and_then(lambda x: _checked_half(x).and_then(_checked_positive))
    assert left == right


@pytest.mark.parametrize("option", OPTIONS)
def test_option_result_round_trip(option: Option[int]) -> None:
    """Going through a Result and back gives the same Option."""
    assert option.ok_or("e").ok() == option


def test_result_option_round_trip() -> None:
    """An Ok survives the round trip, an Err takes the new error."""
    assert Ok(1).ok().ok_or("e") == Ok(1)
    assert Err("original").ok().ok_or("e") == Err("e")


@pytest.mark.parametrize(
    "option",
    [Some(Ok(1)), Some(Err("boom")), NONE],
)
def test_option_transpose_is_its_own_inverse(option: Option[Result[int, str]]) -> None:
    """Transposing twice gives the original back."""
    assert option.transpose().transpose() == option


@pytest.mark.parametrize(
    "result",
    [Ok(Some(1)), Ok(NONE), Err("boom")],
)
def test_result_transpose_is_its_own_inverse(result: Result[Option[int], str]) -> None:
    """Transposing twice gives the original back."""
    assert result.transpose().transpose() == result


def test_collect_preserves_order() -> None:
    """Collect keeps the input order."""
    values = [5, 3, 9, 1]
    assert Option.collect(Some(v) for v in values) == Some(values)
    assert Result.collect(Ok(v) for v in values) == Ok(values)


def test_collect_short_circuits() -> None:
    """Collect returns the first failure."""
    assert Option.collect([Some(1), NONE, NONE]) == NONE
    assert Result.collect([Ok(1), Err(2), Err(3)]) == Err(2)
