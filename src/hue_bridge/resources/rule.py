from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import Field

from hue_bridge.adjust import required, wire
from hue_bridge.resource import Action, BridgeTime, Model, Resource, Writable


class Status(str, Enum):
    ENABLED = "enabled"
    DISABLED = "disabled"
    # Set by the bridge after a rule failed repeatedly.
    RESOURCE_DELETED = "resourcedeleted"


class ConditionOperator(str, Enum):
    EQUAL = "eq"
    GREATER_THAN = "gt"
    LESS_THAN = "lt"
    CHANGED = "dx"
    CHANGED_DELAYED = "ddx"
    STABLE = "stable"
    NOT_STABLE = "not stable"
    IN = "in"
    NOT_IN = "not in"


class Condition(Model):
    address: str
    operator: ConditionOperator
    # Omitted for dx, ddx, stable and not stable.
    value: Optional[str] = None


class Rule(Resource):
    name: str
    owner: Optional[str] = None
    created: BridgeTime = None
    last_triggered: BridgeTime = Field(default=None, alias="lasttriggered")
    times_triggered: int = Field(default=0, alias="timestriggered")
    status: Status
    recycle: Optional[bool] = None
    conditions: list[Condition]
    actions: list[Action]


@dataclass(kw_only=True)
class Creator(Writable):
    name: Optional[str] = wire()
    status: Optional[Status] = wire()
    conditions: list[Condition] = required()
    actions: list[Action] = required()
    recycle: Optional[bool] = wire()


@dataclass(kw_only=True)
class Modifier(Writable):
    name: Optional[str] = wire()
    status: Optional[Status] = wire()
    conditions: Optional[list[Condition]] = wire()
    actions: Optional[list[Action]] = wire()
