from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar, Union

from pydantic import BaseModel

from hue_bridge.errors import SerializationError


T = TypeVar("T")

INCREMENT_SUFFIX = "_inc"


@dataclass(frozen=True)
class Override(Generic[T]):
    """Replace the attribute with ``value``."""

    value: T


@dataclass(frozen=True)
class Increment(Generic[T]):
    """Add ``delta`` to the current value; the bridge clamps the result."""

    delta: T


Adjuster = Union[Override[T], Increment[T]]


@dataclass(frozen=True)
class Delta:
    """How an adjustable field is incremented.

    ``bits`` is the signed width of the delta, one rank wider than the unsigned
    attribute so that the full range can be walked down to zero in one step.
    ``None`` means a floating point delta. ``arity`` is 2 for xy pairs.
    """

    bits: int | None = None
    arity: int = 1


U8_DELTA = Delta(bits=16)
U16_DELTA = Delta(bits=32)
XY_DELTA = Delta(arity=2)


def wire(key: str | None = None, *, delta: Delta | None = None, default: Any = None) -> Any:
    """Declare a write field: its bridge key and, for adjustable fields, how it is incremented."""
    metadata: dict[str, Any] = {}
    if key is not None:
        metadata["key"] = key
    if delta is not None:
        metadata["delta"] = delta
    return dataclasses.field(default=default, metadata=metadata)


def required(key: str | None = None) -> Any:
    metadata = {"key": key} if key is not None else {}
    return dataclasses.field(metadata=metadata)


def serialize(obj: Any) -> dict[str, Any]:
    """Flatten a creator or modifier into the bridge's JSON body.

    Fields are emitted in declaration order and only when set.
    """
    if not dataclasses.is_dataclass(obj) or isinstance(obj, type):
        raise SerializationError(f"Cannot serialize {type(obj).__name__}; expected a modifier or creator")
    body: dict[str, Any] = {}
    for f in dataclasses.fields(obj):
        value = getattr(obj, f.name)
        if value is None:
            continue
        key = f.metadata.get("key", f.name)
        delta: Delta | None = f.metadata.get("delta")
        if isinstance(value, (Override, Increment)):
            if delta is None:
                raise SerializationError(f"Field {f.name!r} cannot be adjusted")
            out_key, out_value = _adjusted(f.name, key, value, delta)
            body[out_key] = out_value
        else:
            body[key] = to_json(value)
    return body


def _adjusted(name: str, key: str, adjuster: Override[Any] | Increment[Any], delta: Delta) -> tuple[str, Any]:
    if isinstance(adjuster, Override):
        value = adjuster.value
        if delta.arity == 2:
            return key, list(_pair(name, value))
        if not _is_number(value):
            raise SerializationError(f"Override for {name!r} must be a number, got {value!r}")
        return key, value

    amount = adjuster.delta
    if delta.arity == 2:
        return key + INCREMENT_SUFFIX, list(_pair(name, amount))
    if delta.bits is None:
        if not _is_number(amount):
            raise SerializationError(f"Increment for {name!r} must be a number, got {amount!r}")
        return key + INCREMENT_SUFFIX, amount
    if not isinstance(amount, int) or isinstance(amount, bool):
        raise SerializationError(f"Increment for {name!r} must be an integer, got {amount!r}")
    low = -(1 << (delta.bits - 1))
    high = (1 << (delta.bits - 1)) - 1
    if not low <= amount <= high:
        raise SerializationError(f"Increment for {name!r} must fit in {delta.bits} signed bits, got {amount}")
    return key + INCREMENT_SUFFIX, amount


def _pair(name: str, value: Any) -> tuple[Any, Any]:
    if not isinstance(value, (tuple, list)) or len(value) != 2:
        raise SerializationError(f"{name!r} expects a pair of numbers, got {value!r}")
    if not all(_is_number(v) for v in value):
        raise SerializationError(f"{name!r} expects a pair of numbers, got {value!r}")
    return value[0], value[1]


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def to_json(value: Any) -> Any:
    if hasattr(value, "to_wire"):
        return value.to_wire()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return serialize(value)
    if isinstance(value, (list, tuple)):
        return [to_json(v) for v in value]
    if isinstance(value, dict):
        return {str(k): to_json(v) for k, v in value.items()}
    return value
