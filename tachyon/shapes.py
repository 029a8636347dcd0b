"""Concrete rigid-body shapes: spheres, boxes and static walls."""

from __future__ import annotations

from tachyon.matrix3 import Matrix3
from tachyon.quaternion import Quaternion
from tachyon.rigid_body import RigidBody, ShapeType
from tachyon.vec3 import Vec3


class Sphere(RigidBody):
    """Solid sphere; ``bounding_radius`` is its radius."""

    def __init__(self, radius: float, mass: float) -> None:
        super().__init__()
        self.bounding_radius = radius
        self.set_mass(mass)
        if self.inverse_mass > 0.0:
            inertia = 0.4 * (1.0 / self.inverse_mass) * radius * radius
            self.set_inertia_tensor(Matrix3(inertia, 0, 0, 0, inertia, 0, 0, 0, inertia))
        else:
            self.set_inertia_tensor(Matrix3.zero())

    @property
    def shape_type(self) -> ShapeType:
        return ShapeType.SPHERE


class Box(RigidBody):
    """Solid cuboid described by its half extents along the local axes."""

    def __init__(self, half_extents: Vec3, mass: float) -> None:
        super().__init__()
        self._half_extents = half_extents.copy()
        self.bounding_radius = half_extents.magnitude()
        self.set_mass(mass)
        if self.inverse_mass > 0.0:
            m = 1.0 / self.inverse_mass
            x2 = 4.0 * half_extents.x**2
            y2 = 4.0 * half_extents.y**2
            z2 = 4.0 * half_extents.z**2
            self.set_inertia_tensor(
                Matrix3(
                    m / 12.0 * (y2 + z2), 0, 0,
                    0, m / 12.0 * (x2 + z2), 0,
                    0, 0, m / 12.0 * (x2 + y2),
                )
            )
        else:
            self.set_inertia_tensor(Matrix3.zero())

    @property
    def half_extents(self) -> Vec3:
        return self._half_extents

    @property
    def shape_type(self) -> ShapeType:
        return ShapeType.BOX


def create_wall(position: Vec3, half_extents: Vec3) -> Box:
    """Build an immovable, non-rotating box at ``position``."""
    wall = Box(half_extents, 0.0)
    wall.pos = position.copy()
    wall.vel = Vec3()
    wall.orient = Quaternion.identity()
    wall.bounding_radius = half_extents.magnitude()
    wall.set_inertia_tensor(Matrix3.zero())
    wall.calculate_derived_data()
    return wall