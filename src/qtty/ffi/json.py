"""
qtty.ffi.json
=============

JSON transport for `QuantityRecord`.

Two shapes are supported:

- a bare number, with the unit supplied out of band
  (`to_json_value` / `from_json_value`);
- an object ``{"value": <number>, "unit_id": <int>}`` (`to_json` / `from_json`).

Non-finite values serialize as ``null``. On input, ``NaN``/``Infinity``
literals and booleans are not accepted as numbers.
"""

from __future__ import annotations

import json
import logging
import math
from typing import Any, Optional

from qtty.core.errors import InvalidValueError, UnknownUnitError
from qtty.ffi.registry import resolve
from qtty.ffi.types import QuantityRecord, UnitId

logger = logging.getLogger(__name__)


def _reject_constant(token: str) -> Any:
    raise ValueError(f"non-finite literal {token!r} is not allowed")


def _loads(text: str) -> Any:
    if not isinstance(text, (str, bytes, bytearray)):
        raise InvalidValueError(f"expected JSON text, got {type(text).__name__}")
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError as e:
        logger.debug("rejected JSON payload %r: %s", text, e)
        raise InvalidValueError(f"invalid JSON: {e}") from None


def _as_number(obj: Any) -> Optional[float]:
    if isinstance(obj, bool) or not isinstance(obj, (int, float)):
        return None
    try:
        value = float(obj)
    except OverflowError:
        return None
    # "1e400" parses to inf
    return value if math.isfinite(value) else None


def _dump_value(value: float) -> Optional[float]:
    return value if math.isfinite(value) else None


def to_json_value(record: QuantityRecord) -> str:
    """Serialize only the numeric value (``"null"`` when it is not finite)."""
    return json.dumps(_dump_value(record.value))


def from_json_value(unit_id: int, text: str) -> QuantityRecord:
    uid = resolve(unit_id)
    value = _as_number(_loads(text))
    if value is None:
        raise InvalidValueError(f"expected a JSON number, got {text!r}")
    return QuantityRecord(value, uid)


def to_json(record: QuantityRecord) -> str:
    return json.dumps({"value": _dump_value(record.value), "unit_id": int(record.unit)})


def from_json(text: str) -> QuantityRecord:
    """
    Parse ``{"value": <number>, "unit_id": <int>}``.

    Raises
    ------
    InvalidValueError
        If the text is not JSON, not an object, or ``value`` is missing or not a number.
    UnknownUnitError
        If ``value`` is valid but ``unit_id`` is missing or not a known id.
    """
    obj = _loads(text)
    if not isinstance(obj, dict):
        raise InvalidValueError("expected a JSON object")

    value = _as_number(obj.get("value"))
    if value is None:
        raise InvalidValueError(f"missing or non-numeric 'value' in {text!r}")

    raw_id = obj.get("unit_id")
    uid: Optional[UnitId] = None
    if isinstance(raw_id, int) and not isinstance(raw_id, bool):
        uid = UnitId.from_int(raw_id)
    if uid is None:
        raise UnknownUnitError(f"missing or unknown 'unit_id' in {text!r}")

    return QuantityRecord(value, resolve(uid))


__all__ = ["to_json_value", "from_json_value", "to_json", "from_json"]
