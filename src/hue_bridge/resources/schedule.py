from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import Field

from hue_bridge.adjust import required, wire
from hue_bridge.resource import Action, BridgeTime, Resource, Writable


class Status(str, Enum):
    ENABLED = "enabled"
    DISABLED = "disabled"


class Schedule(Resource):
    name: str
    description: str = ""
    action: Action = Field(alias="command")
    # Bridge time pattern, e.g. "W124/T06:00:00" or "PT00:10:00".
    local_time: str = Field(alias="localtime")
    # Only set for timers.
    start_time: BridgeTime = Field(default=None, alias="starttime")
    status: Status
    auto_delete: Optional[bool] = Field(default=None, alias="autodelete")
    recycle: Optional[bool] = None


@dataclass(kw_only=True)
class Creator(Writable):
    name: Optional[str] = wire()
    description: Optional[str] = wire()
    action: Action = required("command")
    local_time: str = required("localtime")
    status: Optional[Status] = wire()
    auto_delete: Optional[bool] = wire("autodelete")
    recycle: Optional[bool] = wire()


@dataclass(kw_only=True)
class Modifier(Writable):
    name: Optional[str] = wire()
    description: Optional[str] = wire()
    action: Optional[Action] = wire("command")
    local_time: Optional[str] = wire("localtime")
    status: Optional[Status] = wire()
    auto_delete: Optional[bool] = wire("autodelete")
