"""Free vector helpers used by the point-particle force model."""

from __future__ import annotations

import math

from tachyon.vec3 import Vec3

_NORMALIZE_EPSILON = 1e-6


def add(a: Vec3, b: Vec3) -> Vec3:
    return Vec3(a.x + b.x, a.y + b.y, a.z + b.z)


def sub(a: Vec3, b: Vec3) -> Vec3:
    return Vec3(a.x - b.x, a.y - b.y, a.z - b.z)


def scale(v: Vec3, s: float) -> Vec3:
    return Vec3(v.x * s, v.y * s, v.z * s)


def dot(a: Vec3, b: Vec3) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


def length_sq(v: Vec3) -> float:
    return dot(v, v)


def length(v: Vec3) -> float:
    return math.sqrt(length_sq(v))


def normalize(v: Vec3) -> Vec3:
    """Unit vector along ``v``, or the zero vector when ``v`` is nearly zero."""
    size = length(v)
    if size > _NORMALIZE_EPSILON:
        return scale(v, 1.0 / size)
    return Vec3(0.0, 0.0, 0.0)


def cross(a: Vec3, b: Vec3) -> Vec3:
    return Vec3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def clamp(v: Vec3, min_val: float, max_val: float) -> Vec3:
    """Clamp every component of ``v`` into ``[min_val, max_val]``."""
    return Vec3(*(min(max(c, min_val), max_val) for c in v))


def lerp(a: Vec3, b: Vec3, t: float) -> Vec3:
    """Linear interpolation: ``a`` at ``t == 0``, ``b`` at ``t == 1``."""
    return add(scale(a, 1.0 - t), scale(b, t))