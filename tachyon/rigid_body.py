"""Rigid bodies: linear and angular state, force accumulation and integration."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum

from tachyon.matrix3 import Matrix3
from tachyon.matrix4 import Matrix4
from tachyon.quaternion import Quaternion
from tachyon.vec3 import Vec3


class ShapeType(Enum):
    SPHERE = "sphere"
    BOX = "box"
    PLANE = "plane"


@dataclass(eq=False)
class RigidBody(ABC):
    """Base class for simulated bodies; subclasses report their shape."""

    pos: Vec3 = field(default_factory=Vec3)
    vel: Vec3 = field(default_factory=Vec3)
    acc: Vec3 = field(default_factory=Vec3)
    ang_vel: Vec3 = field(default_factory=Vec3)
    force_accum: Vec3 = field(default_factory=Vec3)
    torque_accum: Vec3 = field(default_factory=Vec3)
    prev_acc: Vec3 = field(default_factory=Vec3)
    orient: Quaternion = field(default_factory=Quaternion)
    inverse_inertia: Matrix3 = field(default_factory=Matrix3)
    inverse_inertia_world: Matrix3 = field(default_factory=Matrix3)
    render_matrix: Matrix4 = field(default_factory=Matrix4)
    inverse_mass: float = 0.0
    linear_damp: float = 1.0
    angular_damp: float = 1.0
    bounding_radius: float = 0.0
    is_awake: bool = True

    @property
    @abstractmethod
    def shape_type(self) -> ShapeType:
        """The collision shape of this body."""

    def set_mass(self, mass: float) -> None:
        """Set the mass; non-positive values leave the current mass unchanged."""
        if mass > 0.0:
            self.inverse_mass = 1.0 / mass

    def set_inertia_tensor(self, inertia_tensor: Matrix3) -> None:
        """Store the inverse of a body-space inertia tensor (zero if singular)."""
        self.inverse_inertia = inertia_tensor.inverse()

    def add_force(self, force: Vec3) -> None:
        self.force_accum = self.force_accum + force

    def add_torque(self, torque: Vec3) -> None:
        self.torque_accum = self.torque_accum + torque

    def add_force_at_point(self, force: Vec3, point: Vec3) -> None:
        """Apply ``force`` at world-space ``point``, adding the resulting torque."""
        r = point - self.pos
        self.torque_accum = self.torque_accum + r.cross(force)
        self.force_accum = self.force_accum + force

    def clear_accumulators(self) -> None:
        self.force_accum = Vec3()
        self.torque_accum = Vec3()

    def velocity_at_point(self, point: Vec3) -> Vec3:
        """Velocity of the material point at world-space ``point``."""
        return self.vel + self.ang_vel.cross(point - self.pos)

    def to_local(self, world_point: Vec3) -> Vec3:
        return self.orient.inverse().rotate(world_point - self.pos)

    def to_world(self, local_point: Vec3) -> Vec3:
        return self.pos + self.orient.rotate(local_point)

    def calculate_derived_data(self) -> None:
        """Renormalise the orientation and refresh world inertia and render transform."""
        self.orient.normalize()
        rot = self.orient.to_matrix3()
        self.inverse_inertia_world = rot @ self.inverse_inertia @ rot.transpose()
        self.render_matrix = Matrix4.from_transform(self.orient, self.pos)

    def integrate(self, duration: float) -> None:
        """Advance the body by ``duration``; sleeping or static bodies do not move."""
        if not self.is_awake or self.inverse_mass == 0.0:
            return

        self.prev_acc = self.acc
        self.acc = self.force_accum * self.inverse_mass
        self.vel = self.vel + self.acc * duration
        self.pos = self.pos + self.vel * duration

        ang_acc = self.inverse_inertia_world @ self.torque_accum
        self.ang_vel = (self.ang_vel + ang_acc * duration) * (self.angular_damp**duration)
        self.orient.integrate_angular_velocity(self.ang_vel, duration)

        self.calculate_derived_data()
        self.clear_accumulators()