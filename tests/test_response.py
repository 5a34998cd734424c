from typing import Any

import pytest

from hue_bridge.errors import BridgeError, DecodeError
from hue_bridge.resources.light import Light
from hue_bridge.response import (
    Failure,
    Modified,
    Success,
    check_all,
    parse_created_id,
    parse_modified,
    parse_response,
)


SUCCESS = {"success": {"/lights/1": "deleted"}}
NOT_FOUND = {"error": {"type": 3, "address": "/lights/1", "description": "resource, /lights/1, not available"}}


def test_parse_response_decodes_bare_object(light_json):
    light = parse_response(light_json(name="Desk"), Light)
    assert light.name == "Desk"
    assert light.state.brightness == 144
    assert light.id == ""


def test_parse_response_raises_when_last_record_is_error():
    with pytest.raises(BridgeError) as exc:
        parse_response([SUCCESS, NOT_FOUND], list[Any])
    assert exc.value.type == 3
    assert exc.value.address == "/lights/1"
    assert "not available" in exc.value.description


def test_parse_response_only_looks_at_last_record():
    # An earlier error does not fail the generic path.
    assert parse_response([NOT_FOUND, SUCCESS], list[Any]) == [NOT_FOUND, SUCCESS]


def test_parse_response_error_array_instead_of_resource():
    unauthorized = [{"error": {"type": 1, "address": "/lights", "description": "unauthorized user"}}]
    with pytest.raises(BridgeError) as exc:
        parse_response(unauthorized, dict[str, Light])
    assert exc.value.type == 1


def test_parse_response_empty_array_falls_through_to_decode():
    assert parse_response([], list[Any]) == []
    with pytest.raises(DecodeError):
        parse_response([], dict[str, Light])


def test_parse_response_shape_mismatch_is_decode_error_not_bridge_error():
    with pytest.raises(DecodeError) as exc:
        parse_response({"name": "no state"}, Light)
    assert not isinstance(exc.value, BridgeError)


def test_malformed_error_record_is_not_treated_as_outcome():
    raw = [{"error": "just a string"}]
    assert parse_response(raw, list[Any]) == raw


def test_check_all_accepts_success_records():
    records = check_all([SUCCESS])
    assert records == [Success({"/lights/1": "deleted"})]


def test_check_all_fails_even_if_error_is_not_last():
    with pytest.raises(BridgeError) as exc:
        check_all([NOT_FOUND, SUCCESS])
    assert exc.value.type == 3


def test_check_all_fails_on_error_after_success():
    with pytest.raises(BridgeError) as exc:
        check_all([SUCCESS, NOT_FOUND])
    assert exc.value.type == 3


def test_check_all_requires_record_array():
    with pytest.raises(DecodeError):
        check_all({"1": {}})


def test_parse_modified_keeps_failures_as_data():
    raw = [
        {"success": {"/lights/1/state/on": True}},
        {
            "error": {
                "type": 201,
                "address": "/lights/1/state/bri",
                "description": "parameter, bri, is not modifiable. Device is set to off.",
            }
        },
    ]
    records = parse_modified(raw)
    assert records[0] == Success(Modified(address="/lights/1/state/on", value=True))
    assert isinstance(records[1], Failure)
    assert records[1].type == 201
    assert records[1].address == "/lights/1/state/bri"


def test_failure_unwrap_raises_bridge_error():
    failure = Failure(type=7, address="/lights/1/state/xy", description="invalid value")
    with pytest.raises(BridgeError) as exc:
        failure.unwrap()
    assert exc.value.type == 7


def test_parse_modified_rejects_multi_address_success():
    with pytest.raises(DecodeError):
        parse_modified([{"success": {"/a": 1, "/b": 2}}])


def test_parse_created_id_returns_literal_id():
    assert parse_created_id([{"success": {"id": "5"}}]) == "5"


def test_parse_created_id_raises_bridge_error():
    with pytest.raises(BridgeError):
        parse_created_id([{"error": {"type": 301, "address": "/groups", "description": "group table full"}}])


def test_parse_created_id_without_id_is_decode_error():
    with pytest.raises(DecodeError):
        parse_created_id([{"success": {"/groups": "created"}}])
