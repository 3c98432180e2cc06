"""
qtty.ffi.types
==============

Stable integer identifiers and the plain record used at language boundaries.

The numeric values below are part of the boundary contract and must never be
renumbered. Unit ids are grouped by dimension:

=========  =========
Length     100 - 199
Time       200 - 299
Angle      300 - 399
Mass       400 - 499
Power      500 - 599
=========  =========
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Status(IntEnum):
    OK = 0
    UNKNOWN_UNIT = -1
    INCOMPATIBLE_DIM = -2
    NULL_OUT = -3
    INVALID_VALUE = -4


class DimensionId(IntEnum):
    LENGTH = 1
    TIME = 2
    ANGLE = 3
    MASS = 4
    POWER = 5


class UnitId(IntEnum):
    # Length
    METER = 100
    KILOMETER = 101
    ASTRONOMICAL_UNIT = 102
    LIGHT_YEAR = 103
    SOLAR_RADIUS = 104
    PARSEC = 105
    # Time
    SECOND = 200
    MINUTE = 201
    HOUR = 202
    DAY = 203
    MILLISECOND = 204
    WEEK = 205
    YEAR = 206
    CENTURY = 207
    JULIAN_YEAR = 208
    JULIAN_CENTURY = 209
    # Angle
    RADIAN = 300
    DEGREE = 301
    ARCSECOND = 302
    MILLI_ARCSECOND = 303
    HOUR_ANGLE = 304
    # Mass
    GRAM = 400
    KILOGRAM = 401
    SOLAR_MASS = 402
    # Power
    WATT = 500
    SOLAR_LUMINOSITY = 501

    @classmethod
    def from_int(cls, value: int) -> "UnitId | None":
        """Return the member for ``value`` or ``None`` when it is not a known id."""
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class QuantityRecord:
    """A value and the id of its unit, as exchanged across the boundary."""

    value: float
    unit: UnitId


__all__ = ["Status", "DimensionId", "UnitId", "QuantityRecord"]
