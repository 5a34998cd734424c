from __future__ import annotations

from typing import Optional

from pydantic import Field

from hue_bridge.resource import Model


class Amount(Model):
    available: int
    total: int


class SensorAmounts(Amount):
    clip: Optional[Amount] = None
    zll: Optional[Amount] = None
    zgp: Optional[Amount] = None


class SceneAmounts(Amount):
    light_states: Optional[Amount] = Field(default=None, alias="lightstates")


class RuleAmounts(Amount):
    conditions: Optional[Amount] = None
    actions: Optional[Amount] = None


class Streaming(Amount):
    channels: Optional[int] = None


class Timezones(Model):
    values: list[str] = Field(default_factory=list)


class Capabilities(Model):
    """How many more resources of each kind the bridge can hold."""

    lights: Amount
    sensors: SensorAmounts
    groups: Amount
    scenes: SceneAmounts
    schedules: Amount
    rules: RuleAmounts
    resourcelinks: Amount
    streaming: Optional[Streaming] = None
    timezones: Optional[Timezones] = None
