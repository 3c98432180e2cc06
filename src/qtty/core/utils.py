"""
qtty.core.utils
===============

Helpers for rendering quantities as text.

Numbers are printed in their shortest round-trip form. Integral values drop
the trailing ``.0`` so ``Degrees(1.0)`` shows as ``"1 Deg"`` while
``Degrees(45.5)`` shows as ``"45.5 Deg"``.
"""

from __future__ import annotations

import math


def format_value(value: float) -> str:
    if math.isfinite(value) and value.is_integer():
        if value == 0.0:
            # keep the sign of negative zero
            return "-0" if math.copysign(1.0, value) < 0 else "0"
        return str(int(value))
    return repr(value)


def format_quantity(value: float, symbol: str, spec: str = "") -> str:
    """Join a number and a unit symbol; an empty symbol yields the number alone."""
    text = format(value, spec) if spec else format_value(value)
    return f"{text} {symbol}" if symbol else text


__all__ = ["format_value", "format_quantity"]
