"""RGBA colour value and pixel drawing modes."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace


class PixelMode(enum.Enum):
    """How a drawn pixel combines with what is already on the target."""

    NORMAL = 0
    MASK = 1
    ALPHA = 2
    CUSTOM = 3


@dataclass(frozen=True)
class Pixel:
    """An 8-bit-per-channel RGBA colour."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"channel {name}={value} is outside 0..255")

    @classmethod
    def from_int(cls, value: int) -> Pixel:
        """Unpack a 32-bit value laid out as 0xAABBGGRR."""
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError(f"{value:#x} is not a 32-bit pixel value")
        return cls(
            value & 0xFF,
            (value >> 8) & 0xFF,
            (value >> 16) & 0xFF,
            (value >> 24) & 0xFF,
        )

    def to_int(self) -> int:
        """Pack into a 32-bit value laid out as 0xAABBGGRR."""
        return self.r | (self.g << 8) | (self.b << 16) | (self.a << 24)

    def scaled(self, factor: float) -> Pixel:
        """Multiply the colour channels by ``factor``, keeping alpha.

        Results are truncated and limited to 0..255.
        """

        def channel(c: int) -> int:
            return max(0, min(255, int(c * factor)))

        return replace(self, r=channel(self.r), g=channel(self.g), b=channel(self.b))


WHITE = Pixel(255, 255, 255)
GREY = Pixel(192, 192, 192)
DARK_GREY = Pixel(128, 128, 128)
VERY_DARK_GREY = Pixel(64, 64, 64)
RED = Pixel(255, 0, 0)
DARK_RED = Pixel(128, 0, 0)
VERY_DARK_RED = Pixel(64, 0, 0)
YELLOW = Pixel(255, 255, 0)
DARK_YELLOW = Pixel(128, 128, 0)
VERY_DARK_YELLOW = Pixel(64, 64, 0)
GREEN = Pixel(0, 255, 0)
DARK_GREEN = Pixel(0, 128, 0)
VERY_DARK_GREEN = Pixel(0, 64, 0)
CYAN = Pixel(0, 255, 255)
DARK_CYAN = Pixel(0, 128, 128)
VERY_DARK_CYAN = Pixel(0, 64, 64)
BLUE = Pixel(0, 0, 255)
DARK_BLUE = Pixel(0, 0, 128)
VERY_DARK_BLUE = Pixel(0, 0, 64)
MAGENTA = Pixel(255, 0, 255)
DARK_MAGENTA = Pixel(128, 0, 128)
VERY_DARK_MAGENTA = Pixel(64, 0, 64)
BLACK = Pixel(0, 0, 0)
BLANK = Pixel(0, 0, 0, 0)