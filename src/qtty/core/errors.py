"""
qtty.core.errors
================

Exception hierarchy for qtty.

Dimensional mistakes are type errors (the operands are of the wrong kind),
lookups and payload problems are value errors. Every class also derives from
`QttyError` so callers can catch the whole family at once. Classes that map
onto a boundary status code carry it in ``status``; the integer values match
`qtty.ffi.types.Status`.
"""

from __future__ import annotations


class QttyError(Exception):
    """Base class for all qtty errors."""

    status: int = 0


class IncompatibleDimensionError(QttyError, TypeError):
    """Conversion requested between units of different dimensions."""

    status = -2


class UnitMismatchError(QttyError, TypeError):
    """Same-unit arithmetic attempted with operands in different units."""

    status = -2


class SimplificationError(QttyError, TypeError):
    """`simplify()` called on a unit shape with no reduction rule."""


class UnknownUnitError(QttyError, ValueError):
    """A unit symbol or unit id could not be resolved."""

    status = -1


class InvalidValueError(QttyError, ValueError):
    """A transported value is missing or is not a number."""

    status = -4


__all__ = [
    "QttyError",
    "IncompatibleDimensionError",
    "UnitMismatchError",
    "SimplificationError",
    "UnknownUnitError",
    "InvalidValueError",
]
