"""Window front end: runs a renderer in a pygame window."""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass, field
from typing import Sequence

from .canvas import Canvas
from .scene import Mesh, Renderer

APP_NAME = "3D Demo"


@dataclass
class ButtonState:
    """Per-frame state of a key or mouse button."""

    pressed: bool = False
    released: bool = False
    held: bool = False
    _was_down: bool = field(default=False, repr=False)

    def update(self, down: bool) -> None:
        """Fold in whether the button is down this frame."""
        self.pressed = False
        self.released = False
        if down != self._was_down:
            if down:
                self.pressed = not self.held
                self.held = True
            else:
                self.released = True
                self.held = False
        self._was_down = down


def mouse_to_pixel(
    x: int,
    y: int,
    pixel_width: int,
    pixel_height: int,
    screen_width: int,
    screen_height: int,
) -> tuple[int, int]:
    """Convert window coordinates to a pixel position kept on the screen."""
    px = max(0, min(screen_width - 1, int(x / pixel_width)))
    py = max(0, min(screen_height - 1, int(y / pixel_height)))
    return px, py


def _frame_bytes(canvas: Canvas) -> bytes:
    return b"".join(bytes((p.r, p.g, p.b, p.a)) for p in canvas.screen.pixels)


def run(renderer: Renderer, width: int, height: int, pixel_size: int = 2) -> None:
    """Open a window and draw frames from ``renderer`` until it is closed."""
    if pixel_size <= 0:
        raise ValueError(f"pixel size {pixel_size} must be positive")
    canvas = Canvas(width, height)

    import pygame

    pygame.init()
    try:
        window = pygame.display.set_mode((width * pixel_size, height * pixel_size))
        pygame.display.set_caption(APP_NAME)
        last = time.perf_counter()
        frame_timer = 1.0
        frames = 0
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

            now = time.perf_counter()
            elapsed = now - last
            last = now

            renderer.render(canvas, elapsed)

            surface = pygame.image.frombuffer(_frame_bytes(canvas), (width, height), "RGBA")
            window.blit(pygame.transform.scale(surface, window.get_size()), (0, 0))
            pygame.display.flip()

            frame_timer += elapsed
            frames += 1
            if frame_timer >= 1.0:
                frame_timer -= 1.0
                pygame.display.set_caption(f"{APP_NAME} - FPS: {frames}")
                frames = 0
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Load an OBJ mesh and show it spinning."""
    parser = argparse.ArgumentParser(prog="meshview", description="Spin an OBJ mesh.")
    parser.add_argument("obj", nargs="?", default="VideoShip.obj", help="mesh file")
    parser.add_argument("--width", type=int, default=256)
    parser.add_argument("--height", type=int, default=240)
    parser.add_argument("--pixel-size", type=int, default=2)
    args = parser.parse_args(argv)

    if args.width <= 0 or args.height <= 0 or args.pixel_size <= 0:
        print("meshview: sizes must be positive", file=sys.stderr)
        return 1
    try:
        mesh = Mesh.from_obj(args.obj)
    except (OSError, ValueError) as exc:
        print(f"meshview: cannot load {args.obj}: {exc}", file=sys.stderr)
        return 1

    run(Renderer(mesh, args.width, args.height), args.width, args.height, args.pixel_size)
    return 0