"""Small value types shared across the package."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

_BYTE_MAX = 0xFF
_U32_MAX = 0xFFFFFFFF


@dataclass(frozen=True)
class Vec2(Generic[T]):
    """A pair of coordinates or dimensions."""

    x: T
    y: T


@dataclass(frozen=True)
class Color:
    """An ARGB colour with one byte per channel."""

    a: int
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("a", "r", "g", "b"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"colour channel {name!r} must be an int, got {value!r}")
            if not 0 <= value <= _BYTE_MAX:
                raise ValueError(f"colour channel {name!r} out of range 0..255: {value}")

    @classmethod
    def from_hex(cls, value: int) -> Color:
        """Build a colour from a 32-bit 0xAARRGGBB value."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"colour value must be an int, got {value!r}")
        if not 0 <= value <= _U32_MAX:
            raise ValueError(f"colour value out of 32-bit range: {value}")
        a, r, g, b = value.to_bytes(4, "big")
        return cls(a, r, g, b)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> Color:
        """Build a fully opaque colour."""
        return cls(_BYTE_MAX, r, g, b)

    def to_u32(self) -> int:
        """Pack the colour as a 32-bit 0xAARRGGBB value."""
        return int.from_bytes(bytes((self.a, self.r, self.g, self.b)), "big")