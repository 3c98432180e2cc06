"""
qtty.core.simplify
==================

Cancellation rules for composite units.

Only two identities are recognised:

- ``Per(U, U)``            -> `Unitless`
- ``Per(N, Per(N, D))``    -> ``D``

This is not a symbolic simplifier; anything else raises `SimplificationError`.
"""

from __future__ import annotations

from qtty.core.errors import SimplificationError
from qtty.core.unit import Per, Unit, Unitless


def simplify_unit(unit: Unit) -> Unit:
    if isinstance(unit, Per):
        if unit.numerator == unit.denominator:
            return Unitless

        inner = unit.denominator
        if isinstance(inner, Per) and inner.numerator == unit.numerator:
            return inner.denominator

    raise SimplificationError(f"No simplification rule applies to '{unit.symbol}'")


def can_simplify(unit: Unit) -> bool:
    try:
        simplify_unit(unit)
    except SimplificationError:
        return False
    return True


__all__ = ["simplify_unit", "can_simplify"]
