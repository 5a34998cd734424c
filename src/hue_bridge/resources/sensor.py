from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pydantic import Field

from hue_bridge.adjust import wire
from hue_bridge.resource import Alert, BridgeTime, Model, Resource, Writable


class State(Model):
    """Sensor readings. Which fields are present depends on the sensor type."""

    presence: Optional[bool] = None
    flag: Optional[bool] = None
    status: Optional[int] = None
    open: Optional[bool] = None
    button_event: Optional[int] = Field(default=None, alias="buttonevent")
    # Hundredths of a degree Celsius.
    temperature: Optional[int] = None
    # Hundredths of a percent.
    humidity: Optional[int] = None
    light_level: Optional[int] = Field(default=None, alias="lightlevel")
    dark: Optional[bool] = None
    daylight: Optional[bool] = None
    last_updated: BridgeTime = Field(default=None, alias="lastupdated")


class Config(Model):
    on: bool = True
    reachable: Optional[bool] = None
    battery: Optional[int] = None
    url: Optional[str] = None
    alert: Optional[Alert] = None
    led_indication: Optional[bool] = Field(default=None, alias="ledindication")
    user_test: Optional[bool] = Field(default=None, alias="usertest")
    sensitivity: Optional[int] = None
    sensitivity_max: Optional[int] = Field(default=None, alias="sensitivitymax")
    pending: Optional[list[str]] = None
    sunrise_offset: Optional[int] = Field(default=None, alias="sunriseoffset")
    sunset_offset: Optional[int] = Field(default=None, alias="sunsetoffset")
    threshold_dark: Optional[int] = Field(default=None, alias="tholddark")
    threshold_offset: Optional[int] = Field(default=None, alias="tholdoffset")


class Sensor(Resource):
    name: str
    kind: str = Field(alias="type")
    model_id: str = Field(alias="modelid")
    unique_id: Optional[str] = Field(default=None, alias="uniqueid")
    manufacturer_name: Optional[str] = Field(default=None, alias="manufacturername")
    product_name: Optional[str] = Field(default=None, alias="productname")
    software_version: Optional[str] = Field(default=None, alias="swversion")
    state: State
    config: Config
    recycle: Optional[bool] = None


@dataclass(kw_only=True)
class AttributeModifier(Writable):
    name: Optional[str] = wire()


@dataclass(kw_only=True)
class StateModifier(Writable):
    """State of a CLIP sensor; physical sensors report their own state."""

    presence: Optional[bool] = wire()
    flag: Optional[bool] = wire()
    status: Optional[int] = wire()
    open: Optional[bool] = wire()
    button_event: Optional[int] = wire("buttonevent")
    temperature: Optional[int] = wire()
    humidity: Optional[int] = wire()
    light_level: Optional[int] = wire("lightlevel")


@dataclass(kw_only=True)
class ConfigModifier(Writable):
    on: Optional[bool] = wire()
    reachable: Optional[bool] = wire()
    battery: Optional[int] = wire()
    url: Optional[str] = wire()
    alert: Optional[Alert] = wire()
    led_indication: Optional[bool] = wire("ledindication")
    user_test: Optional[bool] = wire("usertest")
    sensitivity: Optional[int] = wire()
    sunrise_offset: Optional[int] = wire("sunriseoffset")
    sunset_offset: Optional[int] = wire("sunsetoffset")
    threshold_dark: Optional[int] = wire("tholddark")
    threshold_offset: Optional[int] = wire("tholdoffset")
