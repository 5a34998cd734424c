import pytest

from hue_bridge.adjust import Increment, Override, serialize
from hue_bridge.color import Color
from hue_bridge.errors import SerializationError
from hue_bridge.resource import Alert, Effect, Scanner
from hue_bridge.resources import group, light


def test_unset_modifier_serializes_to_empty_object():
    assert light.StateModifier().to_body() == {}
    assert light.StaticStateModifier().to_body() == {}
    assert group.StateModifier().to_body() == {}


def test_override_uses_base_key():
    assert light.StateModifier(brightness=Override(200)).to_body() == {"bri": 200}


def test_increment_uses_inc_key_with_signed_delta():
    assert light.StateModifier(brightness=Increment(-10)).to_body() == {"bri_inc": -10}


def test_increment_on_unsigned_8_bit_is_widened_to_16_bits():
    assert light.StateModifier(saturation=Increment(-254)).to_body() == {"sat_inc": -254}
    assert light.StateModifier(saturation=Increment(-32768)).to_body() == {"sat_inc": -32768}
    with pytest.raises(SerializationError):
        light.StateModifier(saturation=Increment(32768)).to_body()


def test_increment_on_unsigned_16_bit_is_widened_to_32_bits():
    assert light.StateModifier(hue=Increment(-65535)).to_body() == {"hue_inc": -65535}
    assert light.StateModifier(color_temperature=Increment(-347)).to_body() == {"ct_inc": -347}
    with pytest.raises(SerializationError):
        light.StateModifier(hue=Increment(2**31)).to_body()


def test_scalar_increment_must_be_integer():
    with pytest.raises(SerializationError):
        light.StateModifier(brightness=Increment(1.5)).to_body()
    with pytest.raises(SerializationError):
        light.StateModifier(brightness=Increment(True)).to_body()


def test_override_pair_serializes_as_two_element_array():
    assert light.StateModifier(color_space_coordinates=Override((0.3, 0.4))).to_body() == {"xy": [0.3, 0.4]}


def test_increment_pair_serializes_each_component():
    body = light.StateModifier(color_space_coordinates=Increment((-0.05, 0.1))).to_body()
    assert body == {"xy_inc": [-0.05, 0.1]}


def test_pair_arity_is_checked():
    with pytest.raises(SerializationError):
        light.StateModifier(color_space_coordinates=Override((0.3,))).to_body()
    with pytest.raises(SerializationError):
        light.StateModifier(color_space_coordinates=Increment((0.1, 0.2, 0.3))).to_body()


def test_plain_fields_emit_literal_values():
    body = light.StateModifier(on=False, alert=Alert.LSELECT, effect=Effect.COLORLOOP, transition_time=4).to_body()
    assert body == {"on": False, "alert": "lselect", "effect": "colorloop", "transitiontime": 4}


def test_fields_are_emitted_in_declaration_order():
    modifier = light.StateModifier(
        transition_time=10,
        color_temperature=Increment(5),
        brightness=Override(1),
        on=True,
    )
    assert list(modifier.to_body()) == ["on", "bri", "ct_inc", "transitiontime"]


def test_adjuster_on_plain_field_is_rejected():
    with pytest.raises(SerializationError):
        light.StaticStateModifier(brightness=Override(10)).to_body()


def test_group_state_modifier_appends_scene():
    body = group.StateModifier(on=True, hue=Increment(100), scene="AB34EF5").to_body()
    assert list(body) == ["on", "hue_inc", "scene"]
    assert body["scene"] == "AB34EF5"


def test_with_color_sets_coordinates_and_brightness():
    color = Color(space_coordinates=(0.7, 0.3), brightness=72)
    body = light.StateModifier(on=True).with_color(color).to_body()
    assert body == {"on": True, "bri": 72, "xy": [0.7, 0.3]}

    static = light.StaticStateModifier().with_color(Color.from_space_coordinates(0.2, 0.1)).to_body()
    assert static == {"xy": [0.2, 0.1]}


def test_scanner_body():
    assert Scanner().to_body() is None
    assert Scanner(device_ids=[]).to_body() is None
    assert Scanner(device_ids=["45AF34", "543636"]).to_body() == {"deviceid": ["45AF34", "543636"]}


def test_serialize_rejects_non_modifiers():
    with pytest.raises(SerializationError):
        serialize({"on": True})
