from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import Field

from hue_bridge.adjust import required, wire
from hue_bridge.resource import BridgeTime, Model, Resource, Writable
from hue_bridge.resources import light


class Kind(str, Enum):
    LIGHT_SCENE = "LightScene"
    GROUP_SCENE = "GroupScene"


class AppData(Model):
    version: Optional[int] = None
    data: Optional[str] = None


class Scene(Resource):
    name: str
    kind: Kind = Field(default=Kind.LIGHT_SCENE, alias="type")
    # Set for group scenes only.
    group: Optional[str] = None
    lights: list[str] = Field(default_factory=list)
    owner: Optional[str] = None
    recycle: bool = False
    locked: bool = False
    app_data: Optional[AppData] = Field(default=None, alias="appdata")
    picture: Optional[str] = None
    last_updated: BridgeTime = Field(default=None, alias="lastupdated")
    version: Optional[int] = None
    # Returned when a single scene is requested, keyed by light id.
    light_states: Optional[dict[str, light.State]] = Field(default=None, alias="lightstates")


@dataclass(kw_only=True)
class AppDataModifier(Writable):
    version: Optional[int] = wire()
    data: Optional[str] = wire()


@dataclass(kw_only=True)
class Creator(Writable):
    name: str = required()
    lights: Optional[list[str]] = wire()
    kind: Optional[Kind] = wire("type")
    group: Optional[str] = wire()
    recycle: Optional[bool] = wire()
    app_data: Optional[AppDataModifier] = wire("appdata")
    picture: Optional[str] = wire()
    light_states: Optional[dict[str, light.StaticStateModifier]] = wire("lightstates")


@dataclass(kw_only=True)
class Modifier(Writable):
    name: Optional[str] = wire()
    lights: Optional[list[str]] = wire()
    # Captures the current state of the scene's lights.
    store_light_state: Optional[bool] = wire("storelightstate")
    light_states: Optional[dict[str, light.StaticStateModifier]] = wire("lightstates")
