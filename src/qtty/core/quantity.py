"""
qtty.core.quantity
==================

Defines the `Quantity` class: a single floating-point value tagged with a `Unit`.

This module provides:
- Conversion between units of the same dimension (`Quantity.to`).
- Same-unit arithmetic, scaling by raw numbers and ordering.
- Composite algebra through `Per`: dividing two quantities yields a rate, and
  multiplying a rate by its denominator gives back the numerator unit.
- The two cancellation rules of `simplify` and `asin` on ratios.

All arithmetic follows IEEE-754: NaN and infinities propagate and division by
zero produces an infinity or NaN instead of raising.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Dict, Type, Union

from qtty.core.dimensions import Dim
from qtty.core.errors import IncompatibleDimensionError, UnitMismatchError
from qtty.core.simplify import simplify_unit
from qtty.core.unit import Per, Unit
from qtty.core.utils import format_quantity

Number = Union[int, float]

# Dimension -> Quantity subclass used when a quantity of that dimension is built.
_QUANTITY_TYPES: Dict[Dim, Type["Quantity"]] = {}


def register_quantity_type(dim: Dim, cls: Type["Quantity"]) -> None:
    """Make ``Quantity(value, unit)`` return ``cls`` instances for units of ``dim``."""
    if not (isinstance(cls, type) and issubclass(cls, Quantity)):
        raise TypeError(f"{cls!r} is not a Quantity subclass")
    _QUANTITY_TYPES[dim] = cls


def _is_number(x: object) -> bool:
    return isinstance(x, Real) and not isinstance(x, bool)


def _as_float(x: Real) -> float:
    try:
        return float(x)
    except OverflowError:
        # ints beyond the double range
        return math.inf if x > 0 else -math.inf


def _div(a: float, b: float) -> float:
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _fmod(a: float, b: float) -> float:
    # truncated remainder, sign of the dividend
    if b == 0.0 or math.isinf(a) or math.isnan(a) or math.isnan(b):
        return math.nan
    return math.fmod(a, b)


class Quantity:
    """
    A numeric value in a specific unit.

    Attributes
    ----------
    _value : float
        The value expressed in ``unit``.
    unit : Unit
        The unit the value is expressed in.

    Quantities are values: every operation returns a new object.
    """

    __slots__ = ("_value", "unit")

    def __new__(cls, value: float, unit: Unit) -> "Quantity":
        if cls is Quantity:
            cls = _QUANTITY_TYPES.get(getattr(unit, "dim", None), Quantity)
        return object.__new__(cls)

    def __init__(self, value: float, unit: Unit):
        if not isinstance(unit, Unit):
            raise TypeError(f"unit must be a Unit, got {type(unit).__name__}")
        if not _is_number(value):
            raise TypeError(f"value must be a real number, got {type(value).__name__}")
        self._value = _as_float(value)
        self.unit = unit

    def __getnewargs__(self):
        return (self._value, self.unit)

    @classmethod
    def nan(cls, unit: Unit) -> "Quantity":
        return Quantity(math.nan, unit)

    @property
    def value(self) -> float:
        return self._value

    def abs(self) -> "Quantity":
        return Quantity(abs(self._value), self.unit)

    def __abs__(self) -> "Quantity":
        return self.abs()

    # --- conversion ---------------------------------------------------------

    def to(self, new_unit: "Unit | str") -> "Quantity":
        if isinstance(new_unit, str):
            from qtty.units.registry import DEFAULT_REGISTRY
            new_unit = DEFAULT_REGISTRY.get(new_unit)

        if not isinstance(new_unit, Unit):
            raise TypeError(f"Cannot convert to {type(new_unit).__name__}; expected a Unit")

        if new_unit.dim != self.unit.dim:
            raise IncompatibleDimensionError(
                f"Cannot convert '{self.unit.name}' ({self.unit.dim!r}) "
                f"to '{new_unit.name}' ({new_unit.dim!r})"
            )
        return Quantity(self._value * (self.unit.ratio / new_unit.ratio), new_unit)

    # --- same-unit helpers ----------------------------------------------------

    def _same_unit(self, other: object, op: str) -> "Quantity":
        if not isinstance(other, Quantity):
            raise TypeError(f"{op} requires a Quantity, got {type(other).__name__}")
        if other.unit != self.unit:
            raise UnitMismatchError(
                f"{op} requires the same unit: '{self.unit.symbol}' and '{other.unit.symbol}'"
            )
        return other

    def add(self, other: "Quantity") -> "Quantity":
        other = self._same_unit(other, "add")
        return Quantity(self._value + other._value, self.unit)

    def sub(self, other: "Quantity") -> "Quantity":
        other = self._same_unit(other, "sub")
        return Quantity(self._value - other._value, self.unit)

    def mul(self, other: "Quantity") -> "Quantity":
        other = self._same_unit(other, "mul")
        return Quantity(self._value * other._value, self.unit)

    def div(self, other: "Quantity") -> "Quantity":
        other = self._same_unit(other, "div")
        return Quantity(_div(self._value, other._value), self.unit)

    def min(self, other: "Quantity") -> "Quantity":
        """Smaller of two same-unit quantities; a NaN operand loses to a number."""
        other = self._same_unit(other, "min")
        a, b = self._value, other._value
        if math.isnan(a):
            return Quantity(b, self.unit)
        if math.isnan(b):
            return Quantity(a, self.unit)
        return Quantity(a if a <= b else b, self.unit)

    # --- arithmetic -------------------------------------------------------------

    def __add__(self, other: "Quantity") -> "Quantity":
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Quantity") -> "Quantity":
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.sub(other)

    def __neg__(self) -> "Quantity":
        return Quantity(-self._value, self.unit)

    def __mul__(self, other: "Quantity | Number") -> "Quantity":
        if _is_number(other):
            return Quantity(self._value * _as_float(other), self.unit)
        if not isinstance(other, Quantity):
            return NotImplemented

        # rate x denominator -> numerator, in either order
        if isinstance(self.unit, Per) and self.unit.denominator == other.unit:
            return Quantity(self._value * other._value, self.unit.numerator)
        if isinstance(other.unit, Per) and other.unit.denominator == self.unit:
            return Quantity(self._value * other._value, other.unit.numerator)

        raise UnitMismatchError(
            f"Cannot multiply '{self.unit.symbol}' by '{other.unit.symbol}'; "
            "only a rate times its denominator unit is defined"
        )

    def __rmul__(self, other: Number) -> "Quantity":
        # allows 3 * (2 m) -> 6 m
        if not _is_number(other):
            return NotImplemented
        return Quantity(_as_float(other) * self._value, self.unit)

    def __truediv__(self, other: "Quantity | Number") -> "Quantity":
        if _is_number(other):
            return Quantity(_div(self._value, _as_float(other)), self.unit)
        if not isinstance(other, Quantity):
            return NotImplemented
        return Quantity(_div(self._value, other._value), Per(self.unit, other.unit))

    def __itruediv__(self, other: "Quantity | Number") -> "Quantity":
        # q /= same-unit quantity keeps the unit
        if isinstance(other, Quantity):
            return self.div(other)
        return self.__truediv__(other)

    def __mod__(self, other: Number) -> "Quantity":
        if not _is_number(other):
            return NotImplemented
        return Quantity(_fmod(self._value, _as_float(other)), self.unit)

    # --- comparison -------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if _is_number(other):
            return self._value == other
        if not isinstance(other, Quantity) or other.unit != self.unit:
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def _ordered(self, other: object) -> float:
        return self._same_unit(other, "comparison")._value

    def __lt__(self, other: "Quantity") -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self._value < self._ordered(other)

    def __le__(self, other: "Quantity") -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self._value <= self._ordered(other)

    def __gt__(self, other: "Quantity") -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self._value > self._ordered(other)

    def __ge__(self, other: "Quantity") -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self._value >= self._ordered(other)

    # --- cancellation -----------------------------------------------------------

    def simplify(self) -> "Quantity":
        """
        Cancel a composite unit without touching the value.

        ``Per(U, U)`` becomes unitless and ``Per(N, Per(N, D))`` becomes ``D``.
        Any other unit raises `SimplificationError`.
        """
        return Quantity(self._value, simplify_unit(self.unit))

    def asin(self) -> float:
        """Arcsine (radians) of a same-unit ratio; NaN outside [-1, 1]."""
        unit = self.unit
        if not (isinstance(unit, Per) and unit.numerator == unit.denominator):
            raise UnitMismatchError(f"asin requires a ratio of identical units, got '{unit.symbol}'")
        if -1.0 <= self._value <= 1.0:
            return math.asin(self._value)
        return math.nan

    # --- display ----------------------------------------------------------------

    def __repr__(self) -> str:
        return format_quantity(self._value, self.unit.symbol)

    def __format__(self, spec: str) -> str:
        """
        Format the numeric part with ``spec`` and append the unit symbol.

        Examples
        --------
        >>> f"{Kilometers(1.23456):.2f}"
        '1.23 Km'
        >>> f"{Kilometers(2)}"
        '2 Km'
        """
        return format_quantity(self._value, self.unit.symbol, spec)


NAN = math.nan

__all__ = ["Quantity", "register_quantity_type", "NAN"]
