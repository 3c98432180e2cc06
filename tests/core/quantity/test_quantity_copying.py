import copy
import pickle

import pytest

from qtty.units import (
    AngularQuantity,
    Degree,
    Degrees,
    Kilometer,
    KilometerPerSecond,
    Kilometers,
    KilometersPerSecond,
)


@pytest.mark.parametrize("dup", [copy.copy, copy.deepcopy, lambda q: pickle.loads(pickle.dumps(q))])
@pytest.mark.parametrize("q, unit", [
    (Kilometers(3.0), Kilometer),
    (Degrees(10.0), Degree),
    (KilometersPerSecond(2.0), KilometerPerSecond),
])
def test_quantities_are_copyable_values(dup, q, unit):
    c = dup(q)
    assert type(c) is type(q)
    assert c.value == q.value
    assert c.unit == unit
    assert c == q


def test_copied_angle_keeps_angular_behaviour():
    c = pickle.loads(pickle.dumps(Degrees(370.0)))
    assert isinstance(c, AngularQuantity)
    assert c.wrap_pos().value == pytest.approx(10.0)


def test_copied_rate_still_multiplies_by_its_denominator():
    from qtty.units import Seconds

    rate = copy.deepcopy(KilometersPerSecond(2.0))
    d = rate * Seconds(5.0)
    assert d.unit == Kilometer
    assert d.value == 10.0


def test_containers_of_quantities_deepcopy():
    data = {"a": [Kilometers(1.0), Degrees(2.0)]}
    dup = copy.deepcopy(data)
    assert dup["a"][0] == Kilometers(1.0)
    assert isinstance(dup["a"][1], AngularQuantity)
