"""Compact point particle used by the batched force model."""

from __future__ import annotations

from dataclasses import dataclass, field

from tachyon.vec3 import Vec3


@dataclass
class PointParticle:
    """A point mass with a force accumulator and semi-implicit Euler integration."""

    pos: Vec3 = field(default_factory=Vec3)
    vel: Vec3 = field(default_factory=Vec3)
    acc: Vec3 = field(default_factory=Vec3)
    force: Vec3 = field(default_factory=Vec3)
    inv_mass: float = 1.0
    damping: float = 0.99
    radius: float = 1.0
    prev_pos: Vec3 = field(default_factory=Vec3)
    initialized: bool = False

    def clear_force(self) -> None:
        self.force = Vec3()

    def add_force(self, f: Vec3) -> None:
        self.force = self.force + f

    def has_finite_mass(self) -> bool:
        return self.inv_mass > 0.0

    def integrate(self, dt: float) -> None:
        """Advance the particle by ``dt``; immovable particles are left as they are."""
        if not self.has_finite_mass():
            return
        resulting_acc = self.acc + self.force * self.inv_mass
        self.vel = (self.vel + resulting_acc * dt) * (self.damping**dt)
        self.prev_pos = self.pos.copy()
        self.pos = self.pos + self.vel * dt
        self.clear_force()