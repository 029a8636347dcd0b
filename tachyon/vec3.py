"""Three-component vector with the usual arithmetic and geometric operations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real as _Number
from typing import Iterator

_AXES = ("x", "y", "z")


@dataclass
class Vec3:
    """A 3D vector of real components."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def magnitude(self) -> float:
        return math.sqrt(self.magnitude_squared())

    def magnitude_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalize(self) -> None:
        """Scale this vector to unit length in place; a zero vector is left alone."""
        mag = self.magnitude()
        if mag > 0:
            self.x /= mag
            self.y /= mag
            self.z /= mag

    def normalized(self) -> Vec3:
        result = self.copy()
        result.normalize()
        return result

    def invert(self) -> None:
        """Negate every component in place."""
        self.x, self.y, self.z = -self.x, -self.y, -self.z

    def clear(self) -> None:
        """Set every component to zero."""
        self.x = self.y = self.z = 0.0

    def copy(self) -> Vec3:
        return Vec3(self.x, self.y, self.z)

    def component_product(self, other: Vec3) -> Vec3:
        return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vec3:
        if not isinstance(scalar, _Number):
            return NotImplemented
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec3:
        if not isinstance(scalar, _Number):
            return NotImplemented
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __getitem__(self, index: int) -> float:
        return getattr(self, _AXES[index])

    def __setitem__(self, index: int, value: float) -> None:
        setattr(self, _AXES[index], value)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __len__(self) -> int:
        return 3

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g}, {self.z:g})"