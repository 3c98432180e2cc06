"""
qtty.ffi.registry
=================

Runtime lookup of unit metadata by stable `UnitId`.

Conversion between ids uses the same rule as `Quantity.to`::

    value * (meta(src).scale_to_canonical / meta(dst).scale_to_canonical)

and is only defined between units of the same dimension.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from qtty.core.dimensions import ANGULAR, LENGTH, MASS, POWER, TIME, Dim
from qtty.core.errors import IncompatibleDimensionError, UnknownUnitError
from qtty.core.quantity import Quantity
from qtty.core.unit import Unit
from qtty.ffi.types import DimensionId, QuantityRecord, UnitId
from qtty.units import angular, length, mass, power, time

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class UnitMeta:
    dimension: DimensionId
    scale_to_canonical: float
    name: str
    unit: Unit


_DIMENSION_IDS: Mapping[Dim, DimensionId] = {
    LENGTH: DimensionId.LENGTH,
    TIME: DimensionId.TIME,
    ANGULAR: DimensionId.ANGLE,
    MASS: DimensionId.MASS,
    POWER: DimensionId.POWER,
}

_UNITS: Mapping[UnitId, Unit] = {
    UnitId.METER: length.Meter,
    UnitId.KILOMETER: length.Kilometer,
    UnitId.ASTRONOMICAL_UNIT: length.AstronomicalUnit,
    UnitId.LIGHT_YEAR: length.LightYear,
    UnitId.SOLAR_RADIUS: length.SolarRadius,
    UnitId.PARSEC: length.Parsec,
    UnitId.SECOND: time.Second,
    UnitId.MINUTE: time.Minute,
    UnitId.HOUR: time.Hour,
    UnitId.DAY: time.Day,
    UnitId.MILLISECOND: time.Millisecond,
    UnitId.WEEK: time.Week,
    UnitId.YEAR: time.Year,
    UnitId.CENTURY: time.Century,
    UnitId.JULIAN_YEAR: time.JulianYear,
    UnitId.JULIAN_CENTURY: time.JulianCentury,
    UnitId.RADIAN: angular.Radian,
    UnitId.DEGREE: angular.Degree,
    UnitId.ARCSECOND: angular.Arcsecond,
    UnitId.MILLI_ARCSECOND: angular.MilliArcsecond,
    UnitId.HOUR_ANGLE: angular.HourAngle,
    UnitId.GRAM: mass.Gram,
    UnitId.KILOGRAM: mass.Kilogram,
    UnitId.SOLAR_MASS: mass.SolarMass,
    UnitId.WATT: power.Watt,
    UnitId.SOLAR_LUMINOSITY: power.SolarLuminosity,
}


def _build_meta() -> Mapping[UnitId, UnitMeta]:
    table = {
        uid: UnitMeta(_DIMENSION_IDS[unit.dim], unit.ratio, unit.name, unit)
        for uid, unit in _UNITS.items()
    }
    return MappingProxyType(table)


UNIT_META: Mapping[UnitId, UnitMeta] = _build_meta()
_IDS_BY_UNIT: Mapping[Unit, UnitId] = {unit: uid for uid, unit in _UNITS.items()}


def resolve(unit_id: int) -> UnitId:
    """Validate ``unit_id`` and return it as a `UnitId`."""
    uid = None if isinstance(unit_id, bool) else UnitId.from_int(unit_id)
    if uid is None or uid not in UNIT_META:
        raise UnknownUnitError(f"Unknown unit id: {unit_id!r}")
    return uid


def meta(unit_id: int) -> UnitMeta:
    """Metadata for ``unit_id``; raises `UnknownUnitError` for unrecognised ids."""
    return UNIT_META[resolve(unit_id)]


def is_valid(unit_id: int) -> bool:
    try:
        meta(unit_id)
    except UnknownUnitError:
        return False
    return True


def dimension(unit_id: int) -> DimensionId:
    return meta(unit_id).dimension


def compatible(a: int, b: int) -> bool:
    """True when both ids are known and share a dimension."""
    return meta(a).dimension == meta(b).dimension


def name(unit_id: int) -> str:
    return meta(unit_id).name


def unit_id_for(unit: Unit) -> UnitId:
    try:
        return _IDS_BY_UNIT[unit]
    except KeyError:
        raise UnknownUnitError(f"Unit '{unit.name}' has no stable id") from None


def convert_value(value: float, src: int, dst: int) -> float:
    src_meta, dst_meta = meta(src), meta(dst)
    if src_meta.dimension != dst_meta.dimension:
        logger.debug("rejected conversion %s -> %s: dimension mismatch", src_meta.name, dst_meta.name)
        raise IncompatibleDimensionError(
            f"Cannot convert {src_meta.name} ({src_meta.dimension.name}) "
            f"to {dst_meta.name} ({dst_meta.dimension.name})"
        )
    return float(value) * (src_meta.scale_to_canonical / dst_meta.scale_to_canonical)


def make(value: float, unit_id: int) -> QuantityRecord:
    return QuantityRecord(float(value), resolve(unit_id))


def convert(record: QuantityRecord, dst: int) -> QuantityRecord:
    return QuantityRecord(convert_value(record.value, record.unit, dst), resolve(dst))


def to_record(quantity: Quantity) -> QuantityRecord:
    return QuantityRecord(quantity.value, unit_id_for(quantity.unit))


def from_record(record: QuantityRecord, unit: Unit | None = None) -> Quantity:
    """
    Rebuild a `Quantity` from ``record``.

    When ``unit`` is given the value is converted into it first; the two must
    share a dimension.
    """
    source = meta(record.unit).unit
    q = Quantity(record.value, source)
    return q if unit is None else q.to(unit)


__all__ = [
    "UnitMeta",
    "UNIT_META",
    "resolve",
    "meta",
    "is_valid",
    "dimension",
    "compatible",
    "name",
    "unit_id_for",
    "convert_value",
    "make",
    "convert",
    "to_record",
    "from_record",
]
