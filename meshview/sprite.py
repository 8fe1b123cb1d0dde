"""A 2D grid of pixels with sampling and simple file formats."""

from __future__ import annotations

import enum
import os
import struct
from pathlib import Path
from typing import TYPE_CHECKING

from .pixel import BLANK, Pixel

if TYPE_CHECKING:
    from .resourcepack import ResourcePack

_HEADER = struct.Struct("<ii")


class SampleMode(enum.Enum):
    """How reads outside the sprite are answered."""

    NORMAL = 0
    PERIODIC = 1


class Sprite:
    """A width x height bitmap of :class:`Pixel` values, row-major."""

    def __init__(
        self, width: int = 0, height: int = 0, mode: SampleMode = SampleMode.NORMAL
    ) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"sprite size {width}x{height} is negative")
        self.width = width
        self.height = height
        self.mode = mode
        self.pixels: list[Pixel] = [Pixel()] * (width * height)

    def __repr__(self) -> str:
        return f"Sprite({self.width}, {self.height}, mode={self.mode})"

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_pixel(self, x: int, y: int) -> Pixel:
        """Pixel at (x, y); blank outside in NORMAL mode, wrapped in PERIODIC."""
        if self.mode is SampleMode.NORMAL:
            if self._in_bounds(x, y):
                return self.pixels[y * self.width + x]
            return BLANK
        return self.pixels[(abs(y) % self.height) * self.width + abs(x) % self.width]

    def set_pixel(self, x: int, y: int, pixel: Pixel) -> None:
        """Store ``pixel`` at (x, y); writes outside the sprite are ignored."""
        if self._in_bounds(x, y):
            self.pixels[y * self.width + x] = pixel

    def sample(self, x: float, y: float) -> Pixel:
        """Pixel at normalised coordinates (x, y) in [0, 1]."""
        sx = int(x * self.width - 0.5)
        sy = int(y * self.height - 0.5)
        return self.get_pixel(sx, sy)

    def fill(self, pixel: Pixel) -> None:
        """Set every pixel to ``pixel``."""
        self.pixels = [pixel] * (self.width * self.height)

    def to_bytes(self) -> bytes:
        """Serialise as width, height (i32 each) then RGBA bytes per pixel."""
        body = bytearray()
        for p in self.pixels:
            body += bytes((p.r, p.g, p.b, p.a))
        return _HEADER.pack(self.width, self.height) + bytes(body)

    @classmethod
    def from_bytes(cls, data: bytes) -> Sprite:
        """Build a sprite from the layout written by :meth:`to_bytes`."""
        if len(data) < _HEADER.size:
            raise ValueError("sprite data is shorter than its header")
        width, height = _HEADER.unpack_from(data)
        if width < 0 or height < 0:
            raise ValueError(f"sprite size {width}x{height} is negative")
        body = data[_HEADER.size:_HEADER.size + 4 * width * height]
        if len(body) < 4 * width * height:
            raise ValueError("sprite data is truncated")
        sprite = cls(width, height)
        sprite.pixels = [
            Pixel(*body[i:i + 4]) for i in range(0, len(body), 4)
        ]
        return sprite

    @classmethod
    def load_spr(
        cls, path: str | os.PathLike[str], pack: ResourcePack | None = None
    ) -> Sprite:
        """Load a raw sprite file, from disk or from ``pack`` if one is given."""
        if pack is None:
            data = Path(path).read_bytes()
        else:
            data = pack.get(path)
        return cls.from_bytes(data)

    def save_spr(self, path: str | os.PathLike[str]) -> None:
        """Write the sprite to ``path`` in the raw sprite format."""
        Path(path).write_bytes(self.to_bytes())

    @classmethod
    def load_image(cls, path: str | os.PathLike[str]) -> Sprite:
        """Load an image file (PNG and others Pillow reads) as RGBA."""
        from PIL import Image

        with Image.open(path) as image:
            rgba = image.convert("RGBA")
            width, height = rgba.size
            raw = rgba.tobytes()
        sprite = cls(width, height)
        sprite.pixels = [Pixel(*raw[i:i + 4]) for i in range(0, len(raw), 4)]
        return sprite