from __future__ import annotations

from typing import Any


class HueError(Exception):
    pass


class HueTransportError(HueError):
    pass


class HueUpstreamError(HueError):
    def __init__(self, *, status_code: int, body: Any) -> None:
        super().__init__(f"Hue upstream error: {status_code}")
        self.status_code = status_code
        self.body = body


class DecodeError(HueError):
    """The payload did not match the shape requested by the caller."""


class BridgeError(HueError):
    """The bridge answered with an error record."""

    def __init__(self, *, type: int, address: str, description: str) -> None:
        super().__init__(f"Hue bridge error {type} at {address!r}: {description}")
        self.type = type
        self.address = address
        self.description = description


class SerializationError(HueError):
    pass
