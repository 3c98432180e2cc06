import math

import pytest

from qtty.core.quantity import NAN, Quantity
from qtty.core.unit import Unitless
from qtty.units import (
    AngularQuantity,
    Degree,
    Kilometer,
    Kilometers,
    Meter,
    Meters,
    Seconds,
)


def test_construct_from_int_coerces_to_float():
    q = Quantity(3, Kilometer)
    assert q.value == 3.0
    assert isinstance(q.value, float)
    assert q.unit is Kilometer


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, -0.0, 1e308])
def test_construction_is_total(value):
    q = Meters(value)
    assert q.value == value or (math.isnan(q.value) and math.isnan(value))


def test_construct_requires_a_unit():
    with pytest.raises(TypeError):
        Quantity(1.0, "Km")


def test_nan_constructor_and_constant():
    assert math.isnan(Quantity.nan(Meter).value)
    assert Quantity.nan(Meter).unit is Meter
    assert math.isnan(NAN)


def test_abs_keeps_unit():
    q = Kilometers(-4.5)
    assert q.abs().value == 4.5
    assert abs(q).unit is Kilometer


def test_quantity_dispatches_angular_subclass():
    assert isinstance(Quantity(1.0, Degree), AngularQuantity)
    assert not isinstance(Quantity(1.0, Meter), AngularQuantity)


def test_unitless_quantity():
    q = Quantity(2.0, Unitless)
    assert q.unit is Unitless
    assert repr(q) == "2"


def test_quantities_are_values():
    q = Seconds(1.0)
    r = q
    r += Seconds(2.0)
    assert q.value == 1.0
    assert r.value == 3.0


@pytest.mark.parametrize("value", ["3", None, True, b"1", 1j])
def test_construction_rejects_non_real_values(value):
    with pytest.raises(TypeError):
        Quantity(value, Meter)


def test_huge_integers_saturate_to_infinity():
    assert Meters(10**400).value == math.inf
    assert Meters(-(10**400)).value == -math.inf
    assert (Meters(1.0) * 10**400).value == math.inf
    assert (Meters(1.0) / 10**400).value == 0.0
    assert (10**400 * Meters(-1.0)).value == -math.inf
