from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import Field

from hue_bridge.adjust import required, wire
from hue_bridge.resource import Model, Resource, Writable
from hue_bridge.resources import light


class Kind(str, Enum):
    LIGHT_GROUP = "LightGroup"
    ROOM = "Room"
    LUMINAIRE = "Luminaire"
    LIGHT_SOURCE = "LightSource"
    ENTERTAINMENT = "Entertainment"
    ZONE = "Zone"


class State(Model):
    all_on: bool
    any_on: bool


class Group(Resource):
    name: str
    kind: Kind = Field(alias="type")
    lights: list[str] = Field(default_factory=list)
    sensors: list[str] = Field(default_factory=list)
    # Only for rooms and zones, e.g. "Living room".
    class_: Optional[str] = Field(default=None, alias="class")
    state: Optional[State] = None
    # Last state sent to the group.
    action: Optional[light.State] = None
    recycle: Optional[bool] = None
    model_id: Optional[str] = Field(default=None, alias="modelid")
    unique_id: Optional[str] = Field(default=None, alias="uniqueid")


@dataclass(kw_only=True)
class Creator(Writable):
    name: str = required()
    lights: list[str] = required()
    sensors: Optional[list[str]] = wire()
    kind: Optional[Kind] = wire("type")
    class_: Optional[str] = wire("class")
    recycle: Optional[bool] = wire()


@dataclass(kw_only=True)
class AttributeModifier(Writable):
    name: Optional[str] = wire()
    lights: Optional[list[str]] = wire()
    sensors: Optional[list[str]] = wire()
    class_: Optional[str] = wire("class")


@dataclass(kw_only=True)
class StateModifier(light.StateModifier):
    """Same as a light state change, applied to every light of the group, plus scene recall."""

    scene: Optional[str] = wire()
