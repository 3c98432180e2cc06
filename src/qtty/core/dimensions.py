# qtty.core.dimensions

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

# --- Core objects ------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Dimension:
    """
    Category marker for a physical quantity (length, time, angle, ...).

    A dimension carries no exponents and no behavior. Two dimensions are the
    same iff their names are equal, which is all a conversion needs to check.
    """

    name: str

    def __repr__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True, init=False)
class DivDim(Dimension):
    """Dimension of a quotient ``N / D`` (e.g. Length / Time for velocity)."""

    numerator: Dimension
    denominator: Dimension

    def __init__(self, numerator: Dimension, denominator: Dimension) -> None:
        # frozen dataclass: assign through object.__setattr__
        object.__setattr__(self, "name", f"{numerator.name}/{_wrap(denominator)}")
        object.__setattr__(self, "numerator", numerator)
        object.__setattr__(self, "denominator", denominator)

    def __repr__(self) -> str:
        return f"DivDim({self.numerator!r}, {self.denominator!r})"


def _wrap(dim: Dimension) -> str:
    return f"({dim.name})" if isinstance(dim, DivDim) else dim.name


Dim: TypeAlias = Dimension

# --- Composition ---------------------------------------------------------------

def dim_div(a: Dimension, b: Dimension) -> DivDim:
    """Dimension of ``a`` divided by ``b``; used by `Per` units."""
    return DivDim(a, b)

# --- Public constants ----------------------------------------------------------

LENGTH: Dim        = Dimension("Length")
TIME: Dim          = Dimension("Time")
MASS: Dim          = Dimension("Mass")
POWER: Dim         = Dimension("Power")
ANGULAR: Dim       = Dimension("Angular")
DIMENSIONLESS: Dim = Dimension("Dimensionless")

VELOCITY: Dim  = DivDim(LENGTH, TIME)
FREQUENCY: Dim = DivDim(ANGULAR, TIME)


__all__ = [
    "Dim",
    "Dimension",
    "DivDim",
    "dim_div",
    "LENGTH",
    "TIME",
    "MASS",
    "POWER",
    "ANGULAR",
    "DIMENSIONLESS",
    "VELOCITY",
    "FREQUENCY",
]
