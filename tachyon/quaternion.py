"""Unit quaternions for representing orientation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real as _Number

from tachyon.matrix3 import Matrix3
from tachyon.vec3 import Vec3


@dataclass
class Quaternion:
    """Quaternion ``w + xi + yj + zk``; defaults to the identity rotation."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_axis_angle(cls, angle: float, axis: Vec3) -> Quaternion:
        """Rotation of ``angle`` radians around ``axis``."""
        n = axis.normalized()
        half = angle * 0.5
        s = math.sin(half)
        return cls(math.cos(half), n.x * s, n.y * s, n.z * s)

    @classmethod
    def identity(cls) -> Quaternion:
        return cls(1.0, 0.0, 0.0, 0.0)

    def normalize(self) -> None:
        """Scale to unit length in place; a zero quaternion is left alone."""
        mag = math.sqrt(self.w**2 + self.x**2 + self.y**2 + self.z**2)
        if mag > 0.0:
            self.w /= mag
            self.x /= mag
            self.y /= mag
            self.z /= mag

    def conjugate(self) -> Quaternion:
        return Quaternion(self.w, -self.x, -self.y, -self.z)

    def inverse(self) -> Quaternion:
        """Inverse of a unit quaternion, which is its conjugate."""
        return self.conjugate()

    def rotate(self, v: Vec3) -> Vec3:
        result = self * Quaternion(0.0, v.x, v.y, v.z) * self.conjugate()
        return Vec3(result.x, result.y, result.z)

    def integrate_angular_velocity(self, omega: Vec3, dt: float) -> None:
        """Advance this orientation by angular velocity ``omega`` over ``dt``."""
        dq = (self * Quaternion(0.0, omega.x, omega.y, omega.z)) * (0.5 * dt)
        self.w += dq.w
        self.x += dq.x
        self.y += dq.y
        self.z += dq.z
        self.normalize()

    def to_matrix3(self) -> Matrix3:
        tx, ty, tz = 2.0 * self.x, 2.0 * self.y, 2.0 * self.z
        twx, twy, twz = tx * self.w, ty * self.w, tz * self.w
        txx, txy, txz = tx * self.x, ty * self.x, tz * self.x
        tyy, tyz, tzz = ty * self.y, tz * self.y, tz * self.z
        return Matrix3(
            1 - (tyy + tzz), txy - twz, txz + twy,
            txy + twz, 1 - (txx + tzz), tyz - twx,
            txz - twy, tyz + twx, 1 - (txx + tyy),
        )

    def __mul__(self, other):
        if isinstance(other, Quaternion):
            w, x, y, z = self.w, self.x, self.y, self.z
            return Quaternion(
                w * other.w - x * other.x - y * other.y - z * other.z,
                w * other.x + x * other.w + y * other.z - z * other.y,
                w * other.y - x * other.z + y * other.w + z * other.x,
                w * other.z + x * other.y - y * other.x + z * other.w,
            )
        if isinstance(other, _Number):
            return Quaternion(self.w * other, self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, _Number):
            return self * other
        return NotImplemented

    def __add__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(self.w + other.w, self.x + other.x, self.y + other.y, self.z + other.z)