import math

import pytest

from qtty.core.errors import UnitMismatchError
from qtty.units import Kilometers, Meters


def test_equal_same_unit():
    assert Kilometers(1.0) == Kilometers(1.0)
    assert Kilometers(1.0) != Kilometers(2.0)


def test_equal_against_raw_number():
    assert Kilometers(3.0) == 3.0
    assert Kilometers(3.0) == 3
    assert 3.0 == Kilometers(3.0)
    assert Kilometers(3.0) != 4.0


def test_different_units_are_not_equal():
    # no implicit conversion, even for equal physical length
    assert Kilometers(1.0) != Meters(1000.0)


def test_nan_is_not_equal_to_itself():
    q = Kilometers(math.nan)
    assert q != q


def test_hash_follows_value():
    assert hash(Kilometers(2.0)) == hash(Kilometers(2.0))
    assert hash(Kilometers(2.0)) == hash(2.0)
    assert len({Kilometers(2.0), Kilometers(2.0), Kilometers(3.0)}) == 2


def test_ordering_same_unit():
    assert Kilometers(1.0) < Kilometers(2.0)
    assert Kilometers(2.0) <= Kilometers(2.0)
    assert Kilometers(3.0) > Kilometers(2.0)
    assert Kilometers(2.0) >= Kilometers(2.0)
    assert sorted([Kilometers(3.0), Kilometers(1.0)])[0].value == 1.0


def test_ordering_rejects_mixed_units():
    with pytest.raises(UnitMismatchError):
        _ = Kilometers(1.0) < Meters(2.0)


def test_ordering_against_number_is_not_supported():
    with pytest.raises(TypeError):
        _ = Kilometers(1.0) < 2.0
