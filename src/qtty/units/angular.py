"""
qtty.units.angular
==================

Angular units and the `AngularQuantity` extension.

The canonical angular unit is the degree. Every quantity whose unit has the
`ANGULAR` dimension is built as an `AngularQuantity`, which adds:

- turn constants (`FULL_TURN`, `HALF_TURN`, `QUARTED_TURN`) in its own unit,
- trigonometry (`sin`, `cos`, `tan`, `sin_cos`) evaluated in radians,
- range wrapping:

  ====================  ==========================
  `wrap_pos`            ``[0, FULL_TURN)``
  `wrap_signed`         ``(-HALF_TURN, HALF_TURN]``
  `wrap_signed_lo`      ``[-HALF_TURN, HALF_TURN)``
  `wrap_quarter_fold`   ``[-QUARTER, QUARTER]``
  ====================  ==========================

- angular separations and sexagesimal constructors (`from_dms`, `from_hms`).

Trigonometry of a non-finite angle is NaN rather than an exception.
"""

from __future__ import annotations

import math
from functools import lru_cache
from typing import Tuple

from qtty.core.dimensions import ANGULAR
from qtty.core.quantity import Quantity, register_quantity_type
from qtty.core.unit import Unit, define_unit

Degree         = define_unit("Degree", "Deg", ANGULAR, 1.0)
Radian         = define_unit("Radian", "Rad", ANGULAR, 180.0 / 3.141592653589793)
Arcsecond      = define_unit("Arcsecond", "Arcs", ANGULAR, 1.0 / 3600.0)
MilliArcsecond = define_unit("MilliArcsecond", "Mas", ANGULAR, 1.0 / 3_600_000.0)
HourAngle      = define_unit("HourAngle", "Hms", ANGULAR, 15.0)

Deg = Degree
Rad = Radian
Arcs = Arcsecond
Mas = MilliArcsecond
Hms = HourAngle


@lru_cache(maxsize=None)
def turn_constants(unit: Unit) -> Tuple[float, float, float]:
    """Return ``(full, half, quarter)`` turn sizes expressed in ``unit``."""
    if unit.dim != ANGULAR:
        raise TypeError(f"'{unit.name}' is not an angular unit")
    full = Quantity(math.tau, Radian).to(unit).value
    return full, full * 0.5, full * 0.25


def _rem_euclid(x: float, full: float) -> float:
    if not math.isfinite(x):
        return math.nan
    r = math.fmod(x, full)
    if r < 0.0:
        r += full
    # tiny negative inputs can round up onto the open bound
    if r >= full:
        r = 0.0
    return r


def _finite_or_nan(fn, x: float) -> float:
    return fn(x) if math.isfinite(x) else math.nan


class AngularQuantity(Quantity):
    """A `Quantity` in an angular unit."""

    __slots__ = ()

    # --- turn constants ----------------------------------------------------

    @property
    def FULL_TURN(self) -> "AngularQuantity":
        return Quantity(turn_constants(self.unit)[0], self.unit)

    TAU = FULL_TURN

    @property
    def HALF_TURN(self) -> "AngularQuantity":
        return Quantity(turn_constants(self.unit)[1], self.unit)

    @property
    def QUARTED_TURN(self) -> "AngularQuantity":
        return Quantity(turn_constants(self.unit)[2], self.unit)

    # --- trigonometry ------------------------------------------------------

    def _radians(self) -> float:
        return self.to(Radian).value

    def sin(self) -> float:
        return _finite_or_nan(math.sin, self._radians())

    def cos(self) -> float:
        return _finite_or_nan(math.cos, self._radians())

    def tan(self) -> float:
        return _finite_or_nan(math.tan, self._radians())

    def sin_cos(self) -> Tuple[float, float]:
        x = self._radians()
        return _finite_or_nan(math.sin, x), _finite_or_nan(math.cos, x)

    def signum(self) -> float:
        """``1.0`` for ``+0.0`` and positives, ``-1.0`` for ``-0.0`` and negatives."""
        if math.isnan(self._value):
            return math.nan
        return math.copysign(1.0, self._value)

    # --- wrapping ------------------------------------------------------------

    def wrap_pos(self) -> "AngularQuantity":
        full, _, _ = turn_constants(self.unit)
        return Quantity(_rem_euclid(self._value, full), self.unit)

    def normalize(self) -> "AngularQuantity":
        return self.wrap_pos()

    def wrap_signed(self) -> "AngularQuantity":
        full, half, _ = turn_constants(self.unit)
        y = _rem_euclid(self._value + half, full) - half
        if y <= -half:
            y += full
        return Quantity(y, self.unit)

    def wrap_signed_lo(self) -> "AngularQuantity":
        full, half, _ = turn_constants(self.unit)
        y = self.wrap_signed()._value
        if y >= half:
            y -= full
        return Quantity(y, self.unit)

    def wrap_quarter_fold(self) -> "AngularQuantity":
        full, half, quarter = turn_constants(self.unit)
        y = _rem_euclid(self._value + quarter, full)
        return Quantity(quarter - abs(y - half), self.unit)

    # --- separations ---------------------------------------------------------

    def signed_separation(self, other: "AngularQuantity") -> "AngularQuantity":
        """Shortest signed angle from ``other`` to ``self``, in ``(-HALF_TURN, HALF_TURN]``."""
        return (self - other).wrap_signed()

    def abs_separation(self, other: "AngularQuantity") -> "AngularQuantity":
        return self.signed_separation(other).abs()


register_quantity_type(ANGULAR, AngularQuantity)


Degrees         = Degree
Radians         = Radian
Arcseconds      = Arcsecond
MilliArcseconds = MilliArcsecond
HourAngles      = HourAngle

DEG        = Degrees(1.0)
RAD        = Radians(1.0)
ARCS       = Arcseconds(1.0)
MAS        = MilliArcseconds(1.0)
HOUR_ANGLE = HourAngles(1.0)


def _sexagesimal(negative: bool, whole: float, minutes: float, seconds: float) -> float:
    total = abs(whole) + abs(minutes) / 60.0 + abs(seconds) / 3600.0
    return -total if negative else total


def from_dms(deg: float, minutes: float = 0.0, seconds: float = 0.0) -> AngularQuantity:
    """
    Degrees from degree/minute/second components.

    The sign comes from ``deg``; ``minutes`` and ``seconds`` are magnitudes.
    No range checking is done, use one of the wrap helpers for that.

    >>> from_dms(-33, 52, 0.0).value < 0
    True
    """
    return Quantity(_sexagesimal(deg < 0, deg, minutes, seconds), Degree)


def from_dms_sign(sign: int, deg: float, minutes: float = 0.0, seconds: float = 0.0) -> AngularQuantity:
    """Degrees with an explicit sign; a negative ``sign`` means minus, anything else plus."""
    return Quantity(_sexagesimal(sign < 0, deg, minutes, seconds), Degree)


def from_hms(hours: float, minutes: float = 0.0, seconds: float = 0.0) -> AngularQuantity:
    """Hour angle from hour/minute/second components, sign taken from ``hours``."""
    return Quantity(_sexagesimal(hours < 0, hours, minutes, seconds), HourAngle)


UNITS = (Degree, Radian, Arcsecond, MilliArcsecond, HourAngle)

__all__ = [
    "AngularQuantity",
    "turn_constants",
    "Degree", "Radian", "Arcsecond", "MilliArcsecond", "HourAngle",
    "Deg", "Rad", "Arcs", "Mas", "Hms",
    "Degrees", "Radians", "Arcseconds", "MilliArcseconds", "HourAngles",
    "DEG", "RAD", "ARCS", "MAS", "HOUR_ANGLE",
    "from_dms", "from_dms_sign", "from_hms",
]
