"""Three-component vector used for points, directions and colours."""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterator

from . import mathutil

_NEAR_ZERO_EPS = 1.0e-8
_AXES = ("x", "y", "z")


class Vec3:
    """A mutable 3D vector of floats."""

    __slots__ = _AXES

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def __repr__(self) -> str:
        return f"Vec3({self.x!r}, {self.y!r}, {self.z!r})"

    def __str__(self) -> str:
        return f"{self.x:g} {self.y:g} {self.z:g}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return tuple(self) == tuple(other)

    __hash__ = None  # mutable

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __getitem__(self, index: int) -> float:
        return getattr(self, _AXES[index])

    def __setitem__(self, index: int, value: float) -> None:
        setattr(self, _AXES[index], float(value))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __iadd__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        self.translate(other)
        return self

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Vec3 | float) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, Real):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Vec3:
        if isinstance(other, Real):
            return Vec3(other * self.x, other * self.y, other * self.z)
        return NotImplemented

    def __imul__(self, factor: float) -> Vec3:
        if not isinstance(factor, Real):
            return NotImplemented
        self.x *= factor
        self.y *= factor
        self.z *= factor
        return self

    def __truediv__(self, factor: float) -> Vec3:
        if not isinstance(factor, Real):
            return NotImplemented
        return (1.0 / factor) * self

    def __itruediv__(self, factor: float) -> Vec3:
        if not isinstance(factor, Real):
            return NotImplemented
        return self.__imul__(1.0 / factor)

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        """Squared Euclidean length."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def near_zero(self) -> bool:
        """True if every component is within 1e-8 of zero."""
        return all(abs(c) < _NEAR_ZERO_EPS for c in self)

    def translate(self, offset: Vec3) -> None:
        """Add ``offset`` to this vector in place."""
        self.x += offset.x
        self.y += offset.y
        self.z += offset.z

    def scale(self, factors: Vec3) -> None:
        """Multiply each component in place by the matching one of ``factors``."""
        self.x *= factors.x
        self.y *= factors.y
        self.z *= factors.z

    def cross(self, other: Vec3) -> Vec3:
        """Cross product with ``other``."""
        return cross_product(self, other)

    def dot(self, other: Vec3) -> float:
        """Dot product with ``other``."""
        return dot_product(self, other)

    def normalize(self) -> None:
        """Scale this vector in place to unit length."""
        self /= self.length()

    @classmethod
    def random(cls, low: float = 0.0, high: float = 1.0) -> Vec3:
        """A vector whose components are random in [low, high)."""
        return cls(
            mathutil.random_double(low, high),
            mathutil.random_double(low, high),
            mathutil.random_double(low, high),
        )

    @classmethod
    def random_in_unit_sphere(cls) -> Vec3:
        """A random point strictly inside the unit sphere."""
        while True:
            p = cls.random(-1.0, 1.0)
            if p.length_squared() < 1.0:
                return p

    @classmethod
    def random_unit_vector(cls) -> Vec3:
        """A random direction of unit length."""
        return unit_vector(cls.random_in_unit_sphere())

    @classmethod
    def random_in_hemisphere(cls, normal: Vec3) -> Vec3:
        """A random point in the unit sphere on the side ``normal`` points to."""
        in_unit_sphere = cls.random_in_unit_sphere()
        if dot_product(in_unit_sphere, normal) > 0.0:
            return in_unit_sphere
        return -in_unit_sphere

    @classmethod
    def random_in_unit_disk(cls) -> Vec3:
        """A random point strictly inside the unit disk in the xy plane."""
        while True:
            p = cls(
                mathutil.random_double(-1.0, 1.0),
                mathutil.random_double(-1.0, 1.0),
                0.0,
            )
            if p.length_squared() < 1.0:
                return p

    @staticmethod
    def reflect(v: Vec3, normal: Vec3) -> Vec3:
        """Reflect ``v`` about the surface with the given unit normal."""
        return v - 2.0 * dot_product(v, normal) * normal

    @staticmethod
    def refract(v: Vec3, normal: Vec3, etai_over_etat: float) -> Vec3:
        """Refract unit vector ``v`` through a surface by Snell's law."""
        cos_theta = min(dot_product(-v, normal), 1.0)
        r_out_perp = etai_over_etat * (v + cos_theta * normal)
        r_out_parallel = -math.sqrt(abs(1.0 - r_out_perp.length_squared())) * normal
        return r_out_perp + r_out_parallel


Point3 = Vec3
Color = Vec3


def dot_product(u: Vec3, v: Vec3) -> float:
    """Dot product of two vectors."""
    return u.x * v.x + u.y * v.y + u.z * v.z


def cross_product(u: Vec3, v: Vec3) -> Vec3:
    """Cross product of two vectors."""
    return Vec3(
        u.y * v.z - u.z * v.y,
        u.z * v.x - u.x * v.z,
        u.x * v.y - u.y * v.x,
    )


def unit_vector(v: Vec3) -> Vec3:
    """Return ``v`` scaled to unit length."""
    return v / v.length()