from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from pydantic import Field, GetCoreSchemaHandler
from pydantic_core import core_schema

from hue_bridge.adjust import required, wire
from hue_bridge.errors import SerializationError
from hue_bridge.resource import Resource, Writable


class Kind(str, Enum):
    LINK = "Link"


class LinkKind(str, Enum):
    GROUP = "groups"
    LIGHT = "lights"
    RESOURCELINK = "resourcelinks"
    RULE = "rules"
    SCENE = "scenes"
    SCHEDULE = "schedules"
    SENSOR = "sensors"


@dataclass(frozen=True)
class Link:
    """Reference to another resource, written as ``/<kind>/<id>`` on the wire."""

    kind: LinkKind
    id: str

    @classmethod
    def parse(cls, value: str) -> "Link":
        parts = value.split("/")
        if len(parts) < 2 or not parts[-1] or not parts[-2]:
            raise SerializationError(f"Expected link in the format /<kind>/<id>, got {value!r}")
        kind, id = parts[-2], parts[-1]
        try:
            link_kind = LinkKind(kind)
        except ValueError:
            raise SerializationError(f"Invalid link type {kind!r} in {value!r}") from None
        return cls(kind=link_kind, id=id)

    def to_wire(self) -> str:
        return f"/{self.kind.value}/{self.id}"

    def __str__(self) -> str:
        return self.to_wire()

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(lambda link: link.to_wire()),
        )

    @classmethod
    def _validate(cls, value: Any) -> "Link":
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Expected link string, got {type(value).__name__}")
        try:
            return cls.parse(value)
        except SerializationError as exc:
            raise ValueError(str(exc)) from exc


class Resourcelink(Resource):
    name: str
    description: str = ""
    owner: Optional[str] = None
    kind: Kind = Field(default=Kind.LINK, alias="type")
    class_id: int = Field(alias="classid")
    # Deleted by the bridge once nothing references it.
    recycle: bool = False
    links: list[Link] = Field(default_factory=list)


@dataclass(kw_only=True)
class Creator(Writable):
    name: str = required()
    description: Optional[str] = wire()
    owner: Optional[str] = wire()
    kind: Optional[Kind] = wire("type")
    class_id: int = required("classid")
    recycle: Optional[bool] = wire()
    links: list[Link] = required()


@dataclass(kw_only=True)
class Modifier(Writable):
    name: Optional[str] = wire()
    description: Optional[str] = wire()
    kind: Optional[Kind] = wire("type")
    class_id: Optional[int] = wire("classid")
    links: Optional[list[Link]] = wire()
