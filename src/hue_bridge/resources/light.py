from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from pydantic import Field

from hue_bridge.adjust import U8_DELTA, U16_DELTA, XY_DELTA, Adjuster, Override, wire
from hue_bridge.color import Color
from hue_bridge.resource import Alert, BridgeTime, ColorMode, Effect, Model, Resource, Writable


class State(Model):
    on: Optional[bool] = None
    # 1..254
    brightness: Optional[int] = Field(default=None, alias="bri")
    # 0 and 65535 are red, 25500 green, 46920 blue.
    hue: Optional[int] = None
    saturation: Optional[int] = Field(default=None, alias="sat")
    color_space_coordinates: Optional[tuple[float, float]] = Field(default=None, alias="xy")
    # Mired.
    color_temperature: Optional[int] = Field(default=None, alias="ct")
    alert: Optional[Alert] = None
    effect: Optional[Effect] = None
    color_mode: Optional[ColorMode] = Field(default=None, alias="colormode")
    reachable: Optional[bool] = None


class SoftwareUpdateState(str, Enum):
    NO_UPDATES = "noupdates"
    NOT_UPDATABLE = "notupdatable"
    TRANSFERRING = "transferring"
    READY_TO_INSTALL = "readytoinstall"
    INSTALLING = "installing"
    BATTERY_LOW = "batterylow"
    ERROR = "error"


class SoftwareUpdate(Model):
    state: SoftwareUpdateState
    last_install: BridgeTime = Field(default=None, alias="lastinstall")


class StartupConfig(Model):
    mode: str
    configured: bool


class Config(Model):
    arche_type: str = Field(alias="archetype")
    function: str
    direction: str
    startup: Optional[StartupConfig] = None


class ColorTemperatureCapabilities(Model):
    min: int
    max: int


class ControlCapabilities(Model):
    min_dimlevel: Optional[int] = Field(default=None, alias="mindimlevel")
    max_lumen: Optional[int] = Field(default=None, alias="maxlumen")
    color_gamut: Optional[list[tuple[float, float]]] = Field(default=None, alias="colorgamut")
    color_gamut_type: Optional[str] = Field(default=None, alias="colorgamuttype")
    color_temperature: Optional[ColorTemperatureCapabilities] = Field(default=None, alias="ct")


class StreamingCapabilities(Model):
    renderer: bool
    proxy: bool


class Capabilities(Model):
    certified: bool
    control: ControlCapabilities
    streaming: Optional[StreamingCapabilities] = None


class Light(Resource):
    name: str
    kind: str = Field(alias="type")
    state: State
    model_id: str = Field(alias="modelid")
    unique_id: Optional[str] = Field(default=None, alias="uniqueid")
    product_id: Optional[str] = Field(default=None, alias="productid")
    product_name: Optional[str] = Field(default=None, alias="productname")
    manufacturer_name: Optional[str] = Field(default=None, alias="manufacturername")
    software_version: str = Field(alias="swversion")
    software_update: Optional[SoftwareUpdate] = Field(default=None, alias="swupdate")
    config: Optional[Config] = None
    capabilities: Optional[Capabilities] = None


@dataclass(kw_only=True)
class AttributeModifier(Writable):
    name: Optional[str] = wire()


@dataclass(kw_only=True)
class StaticStateModifier(Writable):
    """Absolute light state, as stored in scenes.

    Unlike :class:`StateModifier` nothing can be incremented and there is no alert.
    """

    on: Optional[bool] = wire()
    brightness: Optional[int] = wire("bri")
    hue: Optional[int] = wire()
    saturation: Optional[int] = wire("sat")
    color_space_coordinates: Optional[tuple[float, float]] = wire("xy")
    color_temperature: Optional[int] = wire("ct")
    effect: Optional[Effect] = wire()
    # Multiples of 100ms.
    transition_time: Optional[int] = wire("transitiontime")

    def with_color(self, color: Color) -> "StaticStateModifier":
        modifier = replace(self, color_space_coordinates=color.space_coordinates)
        if color.brightness is not None:
            modifier = replace(modifier, brightness=color.brightness)
        return modifier


@dataclass(kw_only=True)
class StateModifier(Writable):
    """Change of a light's state.

    Numeric fields take an :class:`~hue_bridge.adjust.Override` or an
    :class:`~hue_bridge.adjust.Increment`::

        StateModifier(on=True, brightness=Increment(-10))  # {"on": true, "bri_inc": -10}
    """

    on: Optional[bool] = wire()
    brightness: Optional[Adjuster[int]] = wire("bri", delta=U8_DELTA)
    hue: Optional[Adjuster[int]] = wire(delta=U16_DELTA)
    saturation: Optional[Adjuster[int]] = wire("sat", delta=U8_DELTA)
    color_space_coordinates: Optional[Adjuster[tuple[float, float]]] = wire("xy", delta=XY_DELTA)
    color_temperature: Optional[Adjuster[int]] = wire("ct", delta=U16_DELTA)
    alert: Optional[Alert] = wire()
    effect: Optional[Effect] = wire()
    transition_time: Optional[int] = wire("transitiontime")

    def with_color(self, color: Color) -> "StateModifier":
        modifier = replace(self, color_space_coordinates=Override(color.space_coordinates))
        if color.brightness is not None:
            modifier = replace(modifier, brightness=Override(color.brightness))
        return modifier
