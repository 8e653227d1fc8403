import pytest

from satune.ops import (
    BooleanValue,
    Polarity,
    negate_boolean_value,
    negate_polarity,
)


def test_negate_polarity_swaps_true_and_false():
    assert negate_polarity(Polarity.TRUE) is Polarity.FALSE
    assert negate_polarity(Polarity.FALSE) is Polarity.TRUE


@pytest.mark.parametrize("polarity", [Polarity.UNDEFINED, Polarity.BOTHTRUEFALSE])
def test_negate_polarity_fixed_points(polarity):
    assert negate_polarity(polarity) is polarity


@pytest.mark.parametrize("polarity", list(Polarity))
def test_negate_polarity_is_involution(polarity):
    assert negate_polarity(negate_polarity(polarity)) is polarity


def test_negate_polarity_accepts_plain_int():
    assert negate_polarity(int(Polarity.TRUE)) is Polarity.FALSE


def test_negate_polarity_rejects_unknown_value():
    with pytest.raises(ValueError):
        negate_polarity(7)


def test_negate_boolean_value_swaps_must_values():
    assert negate_boolean_value(BooleanValue.MUSTBETRUE) is BooleanValue.MUSTBEFALSE
    assert negate_boolean_value(BooleanValue.MUSTBEFALSE) is BooleanValue.MUSTBETRUE


@pytest.mark.parametrize("value", [BooleanValue.UNDEFINED, BooleanValue.UNSAT])
def test_negate_boolean_value_fixed_points(value):
    assert negate_boolean_value(value) is value


@pytest.mark.parametrize("value", list(BooleanValue))
def test_negate_boolean_value_is_involution(value):
    assert negate_boolean_value(negate_boolean_value(value)) is value


def test_negate_boolean_value_rejects_unknown_value():
    with pytest.raises(ValueError):
        negate_boolean_value(-1)