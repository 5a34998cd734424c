from __future__ import annotations

from dataclasses import dataclass

from hue_bridge.errors import SerializationError


@dataclass(frozen=True)
class Color:
    """A colour as the bridge understands it: CIE xy coordinates plus an optional brightness."""

    space_coordinates: tuple[float, float]
    brightness: int | None = None

    @classmethod
    def from_space_coordinates(cls, x: float, y: float) -> "Color":
        return cls(space_coordinates=(x, y))

    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int) -> "Color":
        for channel in (red, green, blue):
            if not 0 <= channel <= 255:
                raise SerializationError(f"RGB channels must be within 0..255, got {(red, green, blue)}")

        r, g, b = (_gamma(c / 255.0) for c in (red, green, blue))
        # Wide gamut D65 conversion.
        x = r * 0.664511 + g * 0.154324 + b * 0.162028
        y = r * 0.283881 + g * 0.668433 + b * 0.047685
        z = r * 0.000088 + g * 0.072310 + b * 0.986039
        total = x + y + z
        if total == 0:
            return cls(space_coordinates=(0.0, 0.0), brightness=0)
        brightness = min(254, round(y * 254))
        return cls(space_coordinates=(x / total, y / total), brightness=brightness)

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        raw = value[1:] if value.startswith("#") else value
        if len(raw) != 6:
            raise SerializationError(f"Expected a colour like '#rrggbb', got {value!r}")
        try:
            red, green, blue = (int(raw[i : i + 2], 16) for i in (0, 2, 4))
        except ValueError as exc:
            raise SerializationError(f"Expected a colour like '#rrggbb', got {value!r}") from exc
        return cls.from_rgb(red, green, blue)


def _gamma(value: float) -> float:
    if value > 0.04045:
        return ((value + 0.055) / 1.055) ** 2.4
    return value / 12.92
