"""A triangle of three points with fill and edge colours."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .pixel import BLACK, WHITE, Pixel
from .vec3 import Vec3

if TYPE_CHECKING:
    from .canvas import Canvas


@dataclass
class Triangle:
    """Three corner points plus the colours used to fill and outline them.

    The points are copied on construction, so later changes to the vectors
    passed in do not move the triangle.
    """

    p0: Vec3
    p1: Vec3
    p2: Vec3
    fill_color: Pixel = WHITE
    edge_color: Pixel = BLACK

    def __post_init__(self) -> None:
        self.p0 = Vec3(*self.p0)
        self.p1 = Vec3(*self.p1)
        self.p2 = Vec3(*self.p2)

    @property
    def points(self) -> tuple[Vec3, Vec3, Vec3]:
        """The three corners in order."""
        return (self.p0, self.p1, self.p2)

    def normal(self) -> Vec3:
        """Unit normal following the right-hand rule over p0, p1, p2."""
        normal = (self.p1 - self.p0).cross(self.p2 - self.p0)
        length = normal.length()
        if length == 0.0:
            raise ValueError("a degenerate triangle has no normal")
        normal /= length
        return normal

    def _screen_coords(self) -> tuple[int, int, int, int, int, int]:
        return (
            int(self.p0.x), int(self.p0.y),
            int(self.p1.x), int(self.p1.y),
            int(self.p2.x), int(self.p2.y),
        )

    def draw(self, canvas: Canvas) -> None:
        """Outline the triangle on ``canvas`` in the edge colour."""
        canvas.draw_triangle(*self._screen_coords(), self.edge_color)

    def fill(self, canvas: Canvas) -> None:
        """Fill the triangle on ``canvas`` in the fill colour."""
        canvas.fill_triangle(*self._screen_coords(), self.fill_color)

    def translate(self, offset: Vec3) -> None:
        """Move every corner by ``offset``."""
        for point in self.points:
            point.translate(offset)

    def scale(self, factors: Vec3) -> None:
        """Scale every corner component-wise by ``factors``."""
        for point in self.points:
            point.scale(factors)

    def depth(self) -> float:
        """Sum of the corners' z values, three times the mean depth."""
        return self.p0.z + self.p1.z + self.p2.z