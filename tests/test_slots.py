"""Tests for slot usage and immutability of the variants."""

import dataclasses

import pytest

import optres as opt


def _check_slots(obj: object) -> bool:
    try:
        _x = obj.__dict__
        return False  # noqa: TRY300
    except AttributeError:
        return True


def test_slots() -> None:  # noqa: D103
    assert _check_slots(opt.Some(42))
    assert _check_slots(opt.NoneOption())
    assert _check_slots(opt.Err[int, object](42))
    assert _check_slots(opt.Ok[int, object](42))


@pytest.mark.parametrize(
    ("instance", "field"),
    [
        (opt.Some(42), "value"),
        (opt.Ok(42), "value"),
        (opt.Err(42), "error"),
    ],
)
def test_frozen(instance: object, field: str) -> None:
    """Payloads cannot be reassigned."""
    with pytest.raises(dataclasses.FrozenInstanceError):
        setattr(instance, field, 0)


def test_hashable() -> None:
    """Variants holding hashable payloads can be used in sets."""
    assert len({opt.Some(1), opt.Some(1), opt.NONE, opt.NoneOption()}) == 2
    assert len({opt.Ok(1), opt.Err(1)}) == 2
