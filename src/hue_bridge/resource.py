from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Optional, TypeVar, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator

from hue_bridge.adjust import serialize, wire


def _none_string(value: Any) -> Any:
    # The bridge writes "none" where a timestamp has never been set.
    if value == "none" or value == "":
        return None
    return value


BridgeTime = Annotated[Optional[datetime], BeforeValidator(_none_string)]

ResourceT = TypeVar("ResourceT", bound="Resource")


class Model(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class Resource(Model):
    """Base for everything read from the bridge.

    The id is the key under which the bridge lists the resource; it is never part
    of the body and is filled in with :meth:`with_id` after decoding.
    """

    id: str = Field(default="", exclude=True)

    def with_id(self: ResourceT, id: str) -> ResourceT:
        return self.model_copy(update={"id": id})


class Writable:
    """Mixin for creator and modifier dataclasses."""

    def to_body(self) -> dict[str, Any]:
        return serialize(self)


class Alert(str, Enum):
    NONE = "none"
    SELECT = "select"
    LSELECT = "lselect"


class Effect(str, Enum):
    NONE = "none"
    COLORLOOP = "colorloop"


class ColorMode(str, Enum):
    HUE_SATURATION = "hs"
    COLOR_SPACE_COORDINATES = "xy"
    COLOR_TEMPERATURE = "ct"


class ActionMethod(str, Enum):
    PUT = "PUT"
    POST = "POST"
    DELETE = "DELETE"


class Action(Model):
    """A request the bridge runs on its own, from a schedule or a rule."""

    address: str
    method: ActionMethod
    body: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_modifier(cls, address: str, modifier: Writable, method: ActionMethod = ActionMethod.PUT) -> "Action":
        return cls(address=address, method=method, body=modifier.to_body())


class LastScan(str, Enum):
    NONE = "none"
    ACTIVE = "active"


class ScanResource(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    # Devices found by serial number may not have a name yet.
    name: Optional[str] = None


class Scan(BaseModel):
    """Result of a light or sensor search.

    ``last_scan`` is ``active`` while searching, ``none`` if no search ran yet,
    otherwise the time the last search finished.
    """

    model_config = ConfigDict(frozen=True)

    last_scan: Union[LastScan, datetime]
    resources: list[ScanResource] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _split(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "lastscan" not in data:
            return data
        resources = []
        for key, value in data.items():
            if key == "lastscan":
                continue
            name = value.get("name") if isinstance(value, dict) else None
            resources.append({"id": key, "name": name})
        return {"last_scan": data["lastscan"], "resources": resources}


@dataclass(kw_only=True)
class Scanner(Writable):
    """Parameters of a light or sensor search.

    Without device ids the bridge runs a general search; with ids (serial
    numbers printed on the devices) it looks for exactly those.
    """

    device_ids: Optional[list[str]] = wire("deviceid")

    def to_body(self) -> dict[str, Any] | None:
        if not self.device_ids:
            return None
        return serialize(self)
