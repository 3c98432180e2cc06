from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from numbers import Real
from typing import TYPE_CHECKING

from qtty.core.dimensions import DIMENSIONLESS, Dim, dim_div

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from qtty.core.quantity import Quantity

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Unit:
    """
    A unit of measure bound to exactly one dimension.

    Attributes
    ----------
    name : str
        Identifier of the unit (e.g. "Kilometer").
    symbol : str
        Display symbol (e.g. "Km"). Empty for unitless values.
    ratio : float
        How many canonical units of ``dim`` make one of this unit.
        Examples: Meter=1.0, Kilometer=1000.0, Second=1/86400 (canonical is the day).
    dim : Dim
        Dimension the unit measures.

    The constructor does not validate ``ratio``; use `define_unit` for that.
    """

    name: str
    symbol: str
    ratio: float
    dim: Dim

    def __call__(self, value: float) -> "Quantity":
        from qtty.core.quantity import Quantity

        return Quantity(value, self)

    def __rmul__(self, value: float) -> "Quantity":
        # 3 * Kilometer -> 3 Km
        if not isinstance(value, Real):
            return NotImplemented
        from qtty.core.quantity import Quantity

        return Quantity(value, self)

    def __truediv__(self, other: "Unit") -> "Per":
        if not isinstance(other, Unit):
            return NotImplemented
        return Per(self, other)


@dataclass(frozen=True, slots=True, init=False)
class Per(Unit):
    """Composite unit "numerator per denominator"."""

    numerator: Unit
    denominator: Unit

    def __init__(self, numerator: Unit, denominator: Unit) -> None:
        object.__setattr__(self, "name", f"{numerator.name}/{_wrap(denominator, 'name')}")
        object.__setattr__(self, "symbol", f"{numerator.symbol}/{_wrap(denominator, 'symbol')}")
        object.__setattr__(self, "ratio", numerator.ratio / denominator.ratio)
        object.__setattr__(self, "dim", dim_div(numerator.dim, denominator.dim))
        object.__setattr__(self, "numerator", numerator)
        object.__setattr__(self, "denominator", denominator)

    def __repr__(self) -> str:
        return f"Per({self.numerator.name}, {self.denominator.name})"


def _wrap(unit: Unit, attr: str) -> str:
    text = getattr(unit, attr)
    return f"({text})" if isinstance(unit, Per) else text


Unitless = Unit("Unitless", "", 1.0, DIMENSIONLESS)


def define_unit(name: str, symbol: str, dimension: Dim, ratio: float) -> Unit:
    """Create a unit after checking that ``ratio`` is a finite, non-zero number.

    Raises `ValueError` otherwise. Quantities of the returned unit display as
    ``"<value> <symbol>"``.
    """
    if isinstance(ratio, bool) or not isinstance(ratio, Real):
        raise ValueError(f"Unit '{name}': ratio must be a real number, got {type(ratio).__name__}")
    ratio = float(ratio)
    if not math.isfinite(ratio) or ratio == 0.0:
        raise ValueError(f"Unit '{name}': ratio must be finite and non-zero, got {ratio!r}")

    logger.debug("defined unit %s (%s) = %r canonical %s", name, symbol, ratio, dimension.name)
    return Unit(name, symbol, ratio, dimension)


__all__ = ["Unit", "Per", "Unitless", "define_unit"]
