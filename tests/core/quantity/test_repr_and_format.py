import math

import pytest

from qtty.core.unit import Unitless
from qtty.core.quantity import Quantity
from qtty.units import Degrees, Kilometers, Meters, Radians, Seconds, SolarMasses


@pytest.mark.parametrize("q, expected", [
    (Degrees(45.5), "45.5 Deg"),
    (Radians(1.0), "1 Rad"),
    (Kilometers(-2.0), "-2 Km"),
    (SolarMasses(1.0), "1 M☉"),
    (Seconds(0.25), "0.25 sec"),
])
def test_repr_value_and_symbol(q, expected):
    assert repr(q) == expected
    assert str(q) == expected


def test_repr_composite_unit():
    assert repr(Kilometers(10.0) / Seconds(2.0)) == "5 Km/sec"


def test_repr_nested_composite_unit():
    v = Meters(1.0) / (Meters(4.0) / Seconds(2.0))
    assert repr(v) == "0.5 m/(m/sec)"


def test_repr_unitless_shows_number_only():
    assert repr(Quantity(2.5, Unitless)) == "2.5"


def test_repr_non_finite():
    assert repr(Kilometers(math.inf)) == "inf Km"
    assert repr(Kilometers(math.nan)) == "nan Km"


def test_format_spec_applies_to_value():
    assert f"{Kilometers(1.23456):.2f}" == "1.23 Km"
    assert format(Degrees(90.0), ".1e") == "9.0e+01 Deg"


def test_format_empty_spec_matches_repr():
    assert f"{Kilometers(2.0)}" == "2 Km"


def test_format_rejects_bad_spec():
    with pytest.raises(ValueError):
        format(Kilometers(1.0), "zz")
