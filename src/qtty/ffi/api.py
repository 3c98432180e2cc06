"""
qtty.ffi.api
============

Boundary facade: every call returns ``(Status, result)`` instead of raising.

``result`` is ``None`` whenever the status is not `Status.OK`. Only the qtty
error taxonomy is translated; programming errors still propagate.
"""

from __future__ import annotations

from typing import Callable, Optional, Tuple, TypeVar

from qtty.core.errors import QttyError
from qtty.ffi import json as _json
from qtty.ffi import registry
from qtty.ffi.types import DimensionId, QuantityRecord, Status

T = TypeVar("T")

FFI_VERSION = 1


def _call(fn: Callable[..., T], *args) -> Tuple[Status, Optional[T]]:
    try:
        return Status.OK, fn(*args)
    except QttyError as e:
        if not e.status:
            raise
        return Status(e.status), None


def ffi_version() -> int:
    return FFI_VERSION


def unit_is_valid(unit_id: int) -> bool:
    return registry.is_valid(unit_id)


def unit_dimension(unit_id: int) -> Tuple[Status, Optional[DimensionId]]:
    return _call(registry.dimension, unit_id)


def units_compatible(a: int, b: int) -> Tuple[Status, Optional[bool]]:
    """``(OK, False)`` for ids of different dimensions, ``UNKNOWN_UNIT`` if either id is unknown."""
    return _call(registry.compatible, a, b)


def unit_name(unit_id: int) -> Tuple[Status, Optional[str]]:
    return _call(registry.name, unit_id)


def quantity_make(value: float, unit_id: int) -> Tuple[Status, Optional[QuantityRecord]]:
    return _call(registry.make, value, unit_id)


def quantity_convert(src: QuantityRecord, dst: int) -> Tuple[Status, Optional[QuantityRecord]]:
    return _call(registry.convert, src, dst)


def quantity_convert_value(value: float, src: int, dst: int) -> Tuple[Status, Optional[float]]:
    return _call(registry.convert_value, value, src, dst)


def quantity_to_json_value(src: QuantityRecord) -> Tuple[Status, Optional[str]]:
    return _call(_json.to_json_value, src)


def quantity_from_json_value(unit_id: int, text: str) -> Tuple[Status, Optional[QuantityRecord]]:
    return _call(_json.from_json_value, unit_id, text)


def quantity_to_json(src: QuantityRecord) -> Tuple[Status, Optional[str]]:
    return _call(_json.to_json, src)


def quantity_from_json(text: str) -> Tuple[Status, Optional[QuantityRecord]]:
    return _call(_json.from_json, text)


__all__ = [
    "FFI_VERSION",
    "ffi_version",
    "unit_is_valid",
    "unit_dimension",
    "units_compatible",
    "unit_name",
    "quantity_make",
    "quantity_convert",
    "quantity_convert_value",
    "quantity_to_json_value",
    "quantity_from_json_value",
    "quantity_to_json",
    "quantity_from_json",
]
