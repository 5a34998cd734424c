from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Generic, TypeVar, Union

from pydantic import TypeAdapter, ValidationError

from hue_bridge.errors import BridgeError, DecodeError


T = TypeVar("T")


@dataclass(frozen=True)
class Modified:
    """One attribute changed by a write: the address that was written and its new value."""

    address: str
    value: Any


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    type: int
    address: str
    description: str

    def to_error(self) -> BridgeError:
        return BridgeError(type=self.type, address=self.address, description=self.description)

    def unwrap(self) -> Any:
        raise self.to_error()


Response = Union[Success[T], Failure]


def _as_records(raw: Any) -> list[Response[Any]] | None:
    # Strict "array of outcome records" reading; None when the payload is shaped otherwise.
    if not isinstance(raw, list):
        return None
    records: list[Response[Any]] = []
    for item in raw:
        if not isinstance(item, dict) or len(item) != 1:
            return None
        tag, payload = next(iter(item.items()))
        if tag == "success":
            records.append(Success(payload))
        elif tag == "error":
            failure = _failure_from(payload)
            if failure is None:
                return None
            records.append(failure)
        else:
            return None
    return records


def _failure_from(payload: Any) -> Failure | None:
    if not isinstance(payload, dict):
        return None
    err_type = payload.get("type")
    if not isinstance(err_type, int) or isinstance(err_type, bool):
        return None
    address = payload.get("address", "")
    description = payload.get("description", "")
    if not isinstance(address, str) or not isinstance(description, str):
        return None
    return Failure(type=err_type, address=address, description=description)


def _require_records(raw: Any) -> list[Response[Any]]:
    records = _as_records(raw)
    if records is None:
        raise DecodeError(f"Expected an array of outcome records, got {type(raw).__name__}")
    return records


@lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def decode(raw: Any, target: Any) -> Any:
    try:
        return _adapter(target).validate_python(raw)
    except ValidationError as exc:
        raise DecodeError(str(exc)) from exc


def parse_response(raw: Any, target: Any) -> Any:
    """Normalize a bridge reply into ``target``.

    Outcome-record arrays are checked first, but only their last record decides
    whether the call failed. The untouched payload is then decoded into ``target``
    regardless of which shape it had.
    """
    records = _as_records(raw)
    if records and isinstance(records[-1], Failure):
        raise records[-1].to_error()
    return decode(raw, target)


def check_all(raw: Any) -> list[Response[Any]]:
    """Fail on the first error record of a reply, looking at every record."""
    records = _require_records(raw)
    for record in records:
        if isinstance(record, Failure):
            raise record.to_error()
    return records


def parse_modified(raw: Any) -> list[Response[Modified]]:
    """Decode a write reply into one record per attribute; per-field errors are returned, not raised."""
    out: list[Response[Modified]] = []
    for record in _require_records(raw):
        if isinstance(record, Failure):
            out.append(record)
            continue
        payload = record.value
        if not isinstance(payload, dict) or len(payload) != 1:
            raise DecodeError(f"Expected a single address in success record, got {payload!r}")
        address, value = next(iter(payload.items()))
        out.append(Success(Modified(address=address, value=value)))
    return out


def parse_created_id(raw: Any) -> str:
    """Return the id from a creation reply (``[{"success": {"id": "5"}}]``)."""
    for record in check_all(raw):
        payload = record.unwrap()
        if isinstance(payload, dict) and isinstance(payload.get("id"), str):
            return payload["id"]
    raise DecodeError(f"Creation reply did not contain an id: {raw!r}")
