import math

import pytest

from qtty.core.errors import IncompatibleDimensionError, UnknownUnitError
from qtty.ffi import registry
from qtty.ffi.types import DimensionId, QuantityRecord, Status, UnitId
from qtty.units import Arcsecond, Day, Degrees, Kilometer, Kilometers, Meter, Second


def test_discriminants_are_stable():
    assert (UnitId.METER, UnitId.KILOMETER) == (100, 101)
    assert (UnitId.SECOND, UnitId.MINUTE, UnitId.HOUR, UnitId.DAY) == (200, 201, 202, 203)
    assert (UnitId.RADIAN, UnitId.DEGREE) == (300, 301)
    assert (DimensionId.LENGTH, DimensionId.TIME, DimensionId.ANGLE) == (1, 2, 3)
    assert [int(s) for s in Status] == [0, -1, -2, -3, -4]


@pytest.mark.parametrize("uid", list(UnitId))
def test_ids_sit_in_their_dimension_range(uid):
    base = {
        DimensionId.LENGTH: 100,
        DimensionId.TIME: 200,
        DimensionId.ANGLE: 300,
        DimensionId.MASS: 400,
        DimensionId.POWER: 500,
    }[registry.dimension(uid)]
    assert base <= uid < base + 100


@pytest.mark.parametrize("uid", list(UnitId))
def test_every_id_has_metadata(uid):
    m = registry.meta(uid)
    assert m.name
    assert math.isfinite(m.scale_to_canonical) and m.scale_to_canonical != 0.0
    assert registry.unit_id_for(m.unit) is uid


def test_meta_lookup():
    m = registry.meta(101)
    assert m.dimension is DimensionId.LENGTH
    assert m.name == "Kilometer"
    assert m.unit is Kilometer
    assert registry.name(UnitId.DEGREE) == "Degree"


@pytest.mark.parametrize("bad", [0, 99, 106, 999, -1, True, "101"])
def test_unknown_ids(bad):
    assert not registry.is_valid(bad)
    with pytest.raises(UnknownUnitError):
        registry.meta(bad)


def test_compatible():
    assert registry.compatible(UnitId.METER, UnitId.KILOMETER)
    assert not registry.compatible(UnitId.METER, UnitId.SECOND)
    with pytest.raises(UnknownUnitError):
        registry.compatible(UnitId.METER, 12345)


def test_convert_value():
    assert registry.convert_value(1.0, UnitId.KILOMETER, UnitId.METER) == 1000.0
    assert registry.convert_value(1.0, UnitId.DAY, UnitId.HOUR) == pytest.approx(24.0, rel=1e-12)
    assert registry.convert_value(180.0, UnitId.DEGREE, UnitId.RADIAN) == pytest.approx(math.pi, rel=1e-12)


def test_convert_value_matches_quantity_to():
    assert registry.convert_value(12.5, UnitId.DEGREE, UnitId.ARCSECOND) == Degrees(12.5).to(Arcsecond).value
    assert registry.convert_value(3.0, UnitId.SECOND, UnitId.DAY) == Second(3.0).to(Day).value


def test_convert_value_rejects_mixed_dimensions():
    with pytest.raises(IncompatibleDimensionError) as exc:
        registry.convert_value(1.0, UnitId.METER, UnitId.SECOND)
    assert exc.value.status == Status.INCOMPATIBLE_DIM


def test_make_and_convert_records():
    rec = registry.make(2, 101)
    assert rec == QuantityRecord(2.0, UnitId.KILOMETER)
    out = registry.convert(rec, UnitId.METER)
    assert out == QuantityRecord(2000.0, UnitId.METER)
    with pytest.raises(UnknownUnitError):
        registry.make(1.0, 7)


def test_record_round_trip_with_quantities():
    rec = registry.to_record(Kilometers(3.0))
    assert rec == QuantityRecord(3.0, UnitId.KILOMETER)
    q = registry.from_record(rec)
    assert q.unit is Kilometer and q.value == 3.0
    assert registry.from_record(rec, Meter).value == 3000.0


def test_to_record_requires_stable_id():
    with pytest.raises(UnknownUnitError):
        registry.to_record(Kilometers(1.0) / Second(1.0))
