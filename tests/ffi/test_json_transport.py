import json
import math

import pytest

from qtty.core.errors import InvalidValueError, UnknownUnitError
from qtty.ffi.json import from_json, from_json_value, to_json, to_json_value
from qtty.ffi.types import QuantityRecord, UnitId


def test_to_json_value_is_bare_number():
    assert to_json_value(QuantityRecord(1.5, UnitId.METER)) == "1.5"


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_non_finite_values_serialize_as_null(value):
    assert to_json_value(QuantityRecord(value, UnitId.METER)) == "null"
    assert json.loads(to_json(QuantityRecord(value, UnitId.METER)))["value"] is None


def test_from_json_value():
    assert from_json_value(UnitId.DEGREE, "45.5") == QuantityRecord(45.5, UnitId.DEGREE)
    assert from_json_value(301, " 12 ") == QuantityRecord(12.0, UnitId.DEGREE)


def test_from_json_value_unknown_unit_wins_over_bad_text():
    with pytest.raises(UnknownUnitError):
        from_json_value(999, "not json")


@pytest.mark.parametrize("text", ["", "abc", '"1.0"', "true", "null", "[1]", "NaN", "Infinity", "1e400", None])
def test_from_json_value_rejects_non_numbers(text):
    with pytest.raises(InvalidValueError):
        from_json_value(UnitId.METER, text)


def test_to_json_object():
    obj = json.loads(to_json(QuantityRecord(2.5, UnitId.KILOMETER)))
    assert obj == {"value": 2.5, "unit_id": 101}


def test_from_json_object():
    rec = from_json('{"value": 2.5, "unit_id": 101}')
    assert rec == QuantityRecord(2.5, UnitId.KILOMETER)
    assert isinstance(rec.unit, UnitId)


def test_from_json_integer_value_is_float():
    assert from_json('{"value": 3, "unit_id": 200}').value == 3.0


@pytest.mark.parametrize("text", [
    '{"value": 1.0, "unit_id": 999}',
    '{"value": 1.0}',
    '{"value": 1.0, "unit_id": "101"}',
    '{"value": 1.0, "unit_id": 101.0}',
    '{"value": 1.0, "unit_id": true}',
    '{"value": 1.0, "unit_id": -101}',
])
def test_from_json_unknown_unit(text):
    with pytest.raises(UnknownUnitError):
        from_json(text)


@pytest.mark.parametrize("text", [
    '{"unit_id": 101}',
    '{"value": "1.0", "unit_id": 101}',
    '{"value": null, "unit_id": 101}',
    '{"value": false, "unit_id": 101}',
    '{"value": NaN, "unit_id": 101}',
    '{"value": "x", "unit_id": 999}',
    '[1.0, 101]',
    '{broken',
    '',
])
def test_from_json_invalid_value(text):
    with pytest.raises(InvalidValueError):
        from_json(text)
