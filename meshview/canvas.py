"""Software rasteriser: pixels, lines, shapes, sprites and text on a sprite."""

from __future__ import annotations

from typing import Callable, Optional

from .font import FIRST_CHAR, GLYPH_SIZE, GLYPHS_PER_ROW, build_font_sprite
from .pixel import WHITE, Pixel, PixelMode
from .sprite import Sprite

PixelFunc = Callable[[int, int, Pixel, Pixel], Pixel]

_GLYPH_COUNT = 96


class Canvas:
    """A drawing surface of ``width`` x ``height`` pixels.

    Drawing goes to :attr:`target`, which is the screen sprite unless another
    sprite was chosen with :meth:`set_draw_target`.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size {width}x{height} must be positive")
        self.width = width
        self.height = height
        self.screen = Sprite(width, height)
        self.target = self.screen
        self.blend = 1.0
        self._mode = PixelMode.NORMAL
        self._custom: Optional[PixelFunc] = None
        self._font = build_font_sprite()

    @property
    def mode(self) -> PixelMode:
        """The current pixel mode."""
        return self._mode

    @mode.setter
    def mode(self, mode: PixelMode) -> None:
        if mode is PixelMode.CUSTOM and self._custom is None:
            raise ValueError("custom mode needs a function; use set_custom_mode")
        self._mode = mode

    def set_draw_target(self, sprite: Optional[Sprite] = None) -> None:
        """Draw into ``sprite`` from now on, or back into the screen if None."""
        self.target = sprite if sprite is not None else self.screen

    def set_custom_mode(self, func: PixelFunc) -> None:
        """Blend with ``func(x, y, source, dest)`` and switch to CUSTOM mode."""
        self._custom = func
        self._mode = PixelMode.CUSTOM

    def set_pixel_blend(self, blend: float) -> None:
        """Set the ALPHA-mode blend factor, limited to [0, 1]."""
        self.blend = min(1.0, max(0.0, blend))

    def draw(self, x: int, y: int, pixel: Pixel = WHITE) -> None:
        """Plot one pixel according to the current mode."""
        target = self.target
        mode = self._mode
        if mode is PixelMode.NORMAL:
            target.set_pixel(x, y, pixel)
        elif mode is PixelMode.MASK:
            if pixel.a == 255:
                target.set_pixel(x, y, pixel)
        elif mode is PixelMode.ALPHA:
            dest = target.get_pixel(x, y)
            a = pixel.a / 255.0 * self.blend
            c = 1.0 - a

            def mix(src: int, dst: int) -> int:
                return max(0, min(255, int(a * src + c * dst)))

            target.set_pixel(
                x, y, Pixel(mix(pixel.r, dest.r), mix(pixel.g, dest.g), mix(pixel.b, dest.b))
            )
        else:
            assert self._custom is not None
            target.set_pixel(x, y, self._custom(x, y, pixel, target.get_pixel(x, y)))

    def _span(self, start: int, end: int, row: int, pixel: Pixel) -> None:
        for x in range(start, end + 1):
            self.draw(x, row, pixel)

    def draw_line(
        self, x1: int, y1: int, x2: int, y2: int, pixel: Pixel = WHITE
    ) -> None:
        """Draw a line between two points, both ends included."""
        dx = x2 - x1
        dy = y2 - y1

        if dx == 0:
            for y in range(min(y1, y2), max(y1, y2) + 1):
                self.draw(x1, y, pixel)
            return
        if dy == 0:
            self._span(min(x1, x2), max(x1, x2), y1, pixel)
            return

        dx1, dy1 = abs(dx), abs(dy)
        px = 2 * dy1 - dx1
        py = 2 * dx1 - dy1
        step = 1 if (dx < 0) == (dy < 0) else -1

        if dy1 <= dx1:
            x, y, xe = (x1, y1, x2) if dx >= 0 else (x2, y2, x1)
            self.draw(x, y, pixel)
            while x < xe:
                x += 1
                if px < 0:
                    px += 2 * dy1
                else:
                    y += step
                    px += 2 * (dy1 - dx1)
                self.draw(x, y, pixel)
        else:
            x, y, ye = (x1, y1, y2) if dy >= 0 else (x2, y2, y1)
            self.draw(x, y, pixel)
            while y < ye:
                y += 1
                if py <= 0:
                    py += 2 * dx1
                else:
                    x += step
                    py += 2 * (dx1 - dy1)
                self.draw(x, y, pixel)

    def draw_circle(self, x: int, y: int, radius: int, pixel: Pixel = WHITE) -> None:
        """Draw the outline of a circle centred on (x, y)."""
        if not radius:
            return
        x0, y0 = 0, radius
        d = 3 - 2 * radius
        while y0 >= x0:
            for px, py in (
                (x - x0, y - y0), (x - y0, y - x0), (x + y0, y - x0), (x + x0, y - y0),
                (x - x0, y + y0), (x - y0, y + x0), (x + y0, y + x0), (x + x0, y + y0),
            ):
                self.draw(px, py, pixel)
            if d < 0:
                d += 4 * x0 + 6
            else:
                d += 4 * (x0 - y0) + 10
                y0 -= 1
            x0 += 1

    def fill_circle(self, x: int, y: int, radius: int, pixel: Pixel = WHITE) -> None:
        """Fill a circle centred on (x, y)."""
        if not radius:
            return
        x0, y0 = 0, radius
        d = 3 - 2 * radius
        while y0 >= x0:
            self._span(x - x0, x + x0, y - y0, pixel)
            self._span(x - y0, x + y0, y - x0, pixel)
            self._span(x - x0, x + x0, y + y0, pixel)
            self._span(x - y0, x + y0, y + x0, pixel)
            if d < 0:
                d += 4 * x0 + 6
            else:
                d += 4 * (x0 - y0) + 10
                y0 -= 1
            x0 += 1

    def draw_rect(self, x: int, y: int, w: int, h: int, pixel: Pixel = WHITE) -> None:
        """Outline the rectangle from (x, y) to (x + w, y + h) inclusive."""
        self.draw_line(x, y, x + w, y, pixel)
        self.draw_line(x + w, y, x + w, y + h, pixel)
        self.draw_line(x + w, y + h, x, y + h, pixel)
        self.draw_line(x, y + h, x, y, pixel)

    def fill_rect(self, x: int, y: int, w: int, h: int, pixel: Pixel = WHITE) -> None:
        """Fill ``w`` x ``h`` pixels from (x, y), limited to the screen size."""

        def clip(value: int, limit: int) -> int:
            return max(0, min(limit, value))

        x2 = clip(x + w, self.width)
        y2 = clip(y + h, self.height)
        x = clip(x, self.width)
        y = clip(y, self.height)
        for i in range(x, x2):
            for j in range(y, y2):
                self.draw(i, j, pixel)

    def draw_triangle(
        self, x1: int, y1: int, x2: int, y2: int, x3: int, y3: int, pixel: Pixel = WHITE
    ) -> None:
        """Outline a triangle."""
        self.draw_line(x1, y1, x2, y2, pixel)
        self.draw_line(x2, y2, x3, y3, pixel)
        self.draw_line(x3, y3, x1, y1, pixel)

    def fill_triangle(
        self, x1: int, y1: int, x2: int, y2: int, x3: int, y3: int, pixel: Pixel = WHITE
    ) -> None:
        """Fill a triangle with horizontal spans, walking two edges at once."""
        if y1 > y2:
            x1, y1, x2, y2 = x2, y2, x1, y1
        if y1 > y3:
            x1, y1, x3, y3 = x3, y3, x1, y1
        if y2 > y3:
            x2, y2, x3, y3 = x3, y3, x2, y2

        t1x = t2x = x1
        y = y1

        dx1 = x2 - x1
        signx1 = -1 if dx1 < 0 else 1
        dx1 = abs(dx1)
        dy1 = y2 - y1

        dx2 = x3 - x1
        signx2 = -1 if dx2 < 0 else 1
        dx2 = abs(dx2)
        dy2 = y3 - y1

        changed1 = changed2 = False
        if dy1 > dx1:
            dx1, dy1 = dy1, dx1
            changed1 = True
        if dy2 > dx2:
            dx2, dy2 = dy2, dx2
            changed2 = True

        e2 = dx2 >> 1

        if y1 != y2:
            e1 = dx1 >> 1
            i = 0
            while i < dx1:
                t1xp = t2xp = 0
                minx, maxx = min(t1x, t2x), max(t1x, t2x)

                while i < dx1:
                    i += 1
                    e1 += dy1
                    stepped = False
                    while e1 >= dx1:
                        e1 -= dx1
                        if changed1:
                            t1xp = signx1
                        else:
                            stepped = True
                            break
                    if stepped or changed1:
                        break
                    t1x += signx1

                while True:
                    e2 += dy2
                    stepped = False
                    while e2 >= dx2:
                        e2 -= dx2
                        if changed2:
                            t2xp = signx2
                        else:
                            stepped = True
                            break
                    if stepped or changed2:
                        break
                    t2x += signx2

                minx = min(minx, t1x, t2x)
                maxx = max(maxx, t1x, t2x)
                self._span(minx, maxx, y, pixel)
                if not changed1:
                    t1x += signx1
                t1x += t1xp
                if not changed2:
                    t2x += signx2
                t2x += t2xp
                y += 1
                if y == y2:
                    break

        # Second half: from the middle vertex to the bottom one.
        dx1 = x3 - x2
        signx1 = -1 if dx1 < 0 else 1
        dx1 = abs(dx1)
        dy1 = y3 - y2
        t1x = x2

        if dy1 > dx1:
            dx1, dy1 = dy1, dx1
            changed1 = True
        else:
            changed1 = False

        e1 = dx1 >> 1

        i = 0
        while i <= dx1:
            t1xp = t2xp = 0
            minx, maxx = min(t1x, t2x), max(t1x, t2x)

            while i < dx1:
                e1 += dy1
                stepped = False
                while e1 >= dx1:
                    e1 -= dx1
                    if changed1:
                        t1xp = signx1
                    else:
                        stepped = True
                    break
                if stepped or changed1:
                    break
                t1x += signx1
                if i < dx1:
                    i += 1

            while t2x != x3:
                e2 += dy2
                stepped = False
                while e2 >= dx2:
                    e2 -= dx2
                    if changed2:
                        t2xp = signx2
                    else:
                        stepped = True
                        break
                if stepped or changed2:
                    break
                t2x += signx2

            minx = min(minx, t1x, t2x)
            maxx = max(maxx, t1x, t2x)
            self._span(minx, maxx, y, pixel)
            if not changed1:
                t1x += signx1
            t1x += t1xp
            if not changed2:
                t2x += signx2
            t2x += t2xp
            y += 1
            if y > y3:
                return
            i += 1

    def _blit(self, x: int, y: int, w: int, h: int, scale: int,
              source: Callable[[int, int], Pixel]) -> None:
        factor = max(scale, 1)
        for i in range(w):
            for j in range(h):
                colour = source(i, j)
                for si in range(factor):
                    for sj in range(factor):
                        self.draw(x + i * factor + si, y + j * factor + sj, colour)

    def draw_sprite(
        self, x: int, y: int, sprite: Optional[Sprite], scale: int = 1
    ) -> None:
        """Draw a whole sprite with its top-left corner at (x, y)."""
        if sprite is None:
            return
        self._blit(x, y, sprite.width, sprite.height, scale, sprite.get_pixel)

    def draw_partial_sprite(
        self, x: int, y: int, sprite: Optional[Sprite],
        ox: int, oy: int, w: int, h: int, scale: int = 1,
    ) -> None:
        """Draw the ``w`` x ``h`` area of ``sprite`` starting at (ox, oy)."""
        if sprite is None:
            return
        self._blit(x, y, w, h, scale, lambda i, j: sprite.get_pixel(i + ox, j + oy))

    def draw_string(
        self, x: int, y: int, text: str, color: Pixel = WHITE, scale: int = 1
    ) -> None:
        """Draw text in the built-in 8x8 font; newlines start a new line.

        Text is always alpha-blended; the pixel mode is restored afterwards.
        """
        factor = max(scale, 1)
        advance = GLYPH_SIZE * scale
        saved = self._mode
        self._mode = PixelMode.ALPHA
        try:
            sx = sy = 0
            for char in text:
                if char == "\n":
                    sx = 0
                    sy += advance
                    continue
                code = ord(char) - FIRST_CHAR
                if 0 <= code < _GLYPH_COUNT:
                    ox = (code % GLYPHS_PER_ROW) * GLYPH_SIZE
                    oy = (code // GLYPHS_PER_ROW) * GLYPH_SIZE
                    for i in range(GLYPH_SIZE):
                        for j in range(GLYPH_SIZE):
                            if self._font.get_pixel(ox + i, oy + j).r > 0:
                                for si in range(factor):
                                    for sj in range(factor):
                                        self.draw(
                                            x + sx + i * factor + si,
                                            y + sy + j * factor + sj,
                                            color,
                                        )
                sx += advance
        finally:
            self._mode = saved

    def clear(self, pixel: Pixel) -> None:
        """Set every pixel of the draw target to ``pixel``."""
        self.target.fill(pixel)