"""Mesh loading, 4x4 transforms and the spinning-mesh renderer."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass, field
from typing import Iterable

from .canvas import Canvas
from .mathutil import degrees_to_radians
from .pixel import BLACK, WHITE
from .triangle import Triangle
from .vec3 import Vec3, unit_vector


def _zeros() -> list[list[float]]:
    return [[0.0] * 4 for _ in range(4)]


@dataclass
class Mat4:
    """A 4x4 matrix applied to row vectors (x, y, z, 1)."""

    m: list[list[float]] = field(default_factory=_zeros)

    @classmethod
    def projection(
        cls,
        width: float,
        height: float,
        fov: float = 90.0,
        z_near: float = 0.1,
        z_far: float = 1000.0,
    ) -> Mat4:
        """Perspective projection for a screen of the given size."""
        if width <= 0 or height <= 0:
            raise ValueError(f"screen size {width}x{height} must be positive")
        if z_far == z_near:
            raise ValueError("near and far planes must differ")
        aspect = height / width
        fov_rad = 1.0 / math.tan(0.5 * degrees_to_radians(fov))
        mat = cls()
        m = mat.m
        m[0][0] = aspect * fov_rad
        m[1][1] = fov_rad
        m[2][2] = z_far / (z_far - z_near)
        m[3][2] = (-z_far * z_near) / (z_far - z_near)
        m[2][3] = 1.0
        m[3][3] = 0.0
        return mat

    @classmethod
    def rotation_z(cls, theta: float) -> Mat4:
        """Rotation by ``theta`` radians about the z axis."""
        mat = cls()
        m = mat.m
        m[0][0] = math.cos(theta)
        m[0][1] = math.sin(theta)
        m[1][0] = -math.sin(theta)
        m[1][1] = math.cos(theta)
        m[2][2] = 1.0
        m[3][3] = 1.0
        return mat

    @classmethod
    def rotation_x(cls, theta: float) -> Mat4:
        """Rotation by ``theta`` radians about the x axis."""
        mat = cls()
        m = mat.m
        m[0][0] = 1.0
        m[1][1] = math.cos(theta)
        m[1][2] = math.sin(theta)
        m[2][1] = -math.sin(theta)
        m[2][2] = math.cos(theta)
        m[3][3] = 1.0
        return mat

    def transform(self, v: Vec3) -> Vec3:
        """Apply the matrix to point ``v``, dividing by w unless it is zero."""
        m = self.m
        x, y, z, w = (
            v.x * m[0][c] + v.y * m[1][c] + v.z * m[2][c] + m[3][c] for c in range(4)
        )
        if w != 0.0:
            x /= w
            y /= w
            z /= w
        return Vec3(x, y, z)


@dataclass
class Mesh:
    """A list of triangles."""

    triangles: list[Triangle] = field(default_factory=list)

    @classmethod
    def parse_obj(cls, lines: Iterable[str]) -> Mesh:
        """Build a mesh from Wavefront OBJ lines; only ``v`` and ``f`` are read.

        Face indices are 1-based; only the first three of each face are used.
        """
        vertices: list[Vec3] = []
        triangles: list[Triangle] = []
        for number, line in enumerate(lines, start=1):
            tokens = line.split()
            if not tokens:
                continue
            kind, args = tokens[0], tokens[1:]
            if kind == "v":
                try:
                    x, y, z = (float(t) for t in args[:3])
                except ValueError as exc:
                    raise ValueError(f"line {number}: bad vertex {line.strip()!r}") from exc
                vertices.append(Vec3(x, y, z))
            elif kind == "f":
                if len(args) < 3:
                    raise ValueError(f"line {number}: face needs three vertices")
                corners = []
                for token in args[:3]:
                    try:
                        index = int(token.split("/")[0])
                    except ValueError as exc:
                        raise ValueError(
                            f"line {number}: bad face index {token!r}"
                        ) from exc
                    if not 1 <= index <= len(vertices):
                        raise ValueError(
                            f"line {number}: vertex {index} is not defined"
                        )
                    corners.append(vertices[index - 1])
                triangles.append(Triangle(*corners))
        return cls(triangles)

    @classmethod
    def from_obj(cls, path: str | os.PathLike[str]) -> Mesh:
        """Load a mesh from the OBJ file at ``path``."""
        with open(path, encoding="utf-8") as stream:
            return cls.parse_obj(stream)


@dataclass
class Renderer:
    """Spins a mesh in front of the camera and rasterises it with flat shading."""

    mesh: Mesh
    width: int
    height: int
    fov: float = 90.0
    z_near: float = 0.1
    z_far: float = 1000.0
    distance: float = 8.0
    theta: float = 0.0
    camera: Vec3 = field(default_factory=Vec3)
    light: Vec3 = field(default_factory=lambda: Vec3(0.0, 0.0, -1.0))
    projection_matrix: Mat4 = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.projection_matrix = Mat4.projection(
            self.width, self.height, self.fov, self.z_near, self.z_far
        )
        self.light = unit_vector(self.light)

    def advance(self, elapsed: float) -> None:
        """Move the rotation on by ``elapsed`` seconds."""
        self.theta += elapsed

    def project(self) -> list[Triangle]:
        """Screen-space triangles facing the camera, sorted back to front."""
        rot_z = Mat4.rotation_z(self.theta)
        rot_x = Mat4.rotation_x(self.theta * 0.5)
        offset = Vec3(0.0, 0.0, self.distance)
        to_view = Vec3(1.0, 1.0, 0.0)
        to_screen = Vec3(0.5 * self.width, 0.5 * self.height, 1.0)

        visible: list[Triangle] = []
        for tri in self.mesh.triangles:
            placed = Triangle(*(rot_x.transform(rot_z.transform(p)) for p in tri.points))
            placed.translate(offset)
            try:
                normal = placed.normal()
            except ValueError:
                continue
            if not (placed.p0 - self.camera).dot(normal) < 0.0:
                continue

            shade = self.light.dot(normal)
            projected = Triangle(
                *(self.projection_matrix.transform(p) for p in placed.points),
                fill_color=WHITE.scaled(shade),
            )
            projected.translate(to_view)
            projected.scale(to_screen)
            visible.append(projected)

        visible.sort(key=Triangle.depth, reverse=True)
        return visible

    def render(self, canvas: Canvas, elapsed: float) -> None:
        """Clear ``canvas``, advance by ``elapsed`` and draw one frame."""
        canvas.fill_rect(0, 0, canvas.width, canvas.height, BLACK)
        self.advance(elapsed)
        for tri in self.project():
            tri.fill(canvas)