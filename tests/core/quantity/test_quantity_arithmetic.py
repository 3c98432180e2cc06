import math

import pytest

from qtty.core.errors import UnitMismatchError
from qtty.units import Kilometer, Kilometers, Meters, Seconds


# -------------------------------
# Same-unit named operations
# -------------------------------

def test_named_add_sub_mul_div():
    a, b = Kilometers(6.0), Kilometers(3.0)
    assert a.add(b).value == 9.0
    assert a.sub(b).value == 3.0
    assert a.mul(b).value == 18.0
    assert a.div(b).value == 2.0
    assert all(r.unit is Kilometer for r in (a.add(b), a.sub(b), a.mul(b), a.div(b)))


@pytest.mark.parametrize("op", ["add", "sub", "mul", "div", "min"])
def test_named_ops_reject_mixed_units(op):
    with pytest.raises(UnitMismatchError):
        getattr(Kilometers(1.0), op)(Meters(1.0))


def test_named_ops_require_quantity():
    with pytest.raises(TypeError):
        Kilometers(1.0).add(1.0)


def test_min_picks_smaller():
    assert Kilometers(2.0).min(Kilometers(-1.0)).value == -1.0
    assert Kilometers(-3.0).min(Kilometers(1.0)).value == -3.0


def test_min_ignores_nan_operand():
    assert Kilometers(math.nan).min(Kilometers(2.0)).value == 2.0
    assert Kilometers(2.0).min(Kilometers(math.nan)).value == 2.0
    assert math.isnan(Kilometers(math.nan).min(Kilometers(math.nan)).value)


# -------------------------------
# Operators
# -------------------------------

def test_add_and_sub_same_unit():
    s = Kilometers(1.5) + Kilometers(0.5)
    d = Kilometers(1.5) - Kilometers(0.5)
    assert s.unit is Kilometer and s.value == 2.0
    assert d.unit is Kilometer and d.value == 1.0


def test_add_unit_mismatch_raises_type_error():
    with pytest.raises(TypeError):
        _ = Kilometers(1.0) + Meters(1.0)
    with pytest.raises(UnitMismatchError):
        _ = Kilometers(1.0) - Meters(1.0)


def test_add_scalar_is_not_supported():
    with pytest.raises(TypeError):
        _ = Kilometers(1.0) + 1.0


def test_scalar_multiplication_and_division():
    q = Kilometers(2.0)
    assert (q * 3).value == 6.0
    assert (3 * q).value == 6.0
    assert (q / 2).value == 1.0
    assert (q * 3).unit is Kilometer and (q / 2).unit is Kilometer


def test_negation():
    assert (-Kilometers(2.0)).value == -2.0
    assert (-Kilometers(2.0)).unit is Kilometer


def test_remainder_by_scalar_has_sign_of_dividend():
    assert (Kilometers(7.0) % 3).value == 1.0
    assert (Kilometers(-7.0) % 3).value == -1.0


def test_in_place_operators_rebind():
    q = Seconds(10.0)
    q += Seconds(5.0)
    assert q.value == 15.0
    q -= Seconds(3.0)
    assert q.value == 12.0
    q /= Seconds(4.0)
    assert q.value == 3.0
    assert q.unit is Seconds
    q /= 2
    assert q.value == 1.5


def test_in_place_division_rejects_other_unit():
    q = Seconds(10.0)
    with pytest.raises(UnitMismatchError):
        q /= Kilometers(2.0)


def test_product_of_unrelated_quantities_is_rejected():
    with pytest.raises(UnitMismatchError):
        _ = Kilometers(2.0) * Kilometers(3.0)
