"""Point-mass particle with a force accumulator and damped Euler integration."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from tachyon.vec3 import Vec3


@dataclass
class GpuParticle:
    """Flat snapshot of a particle's state for batched processing."""

    pos: Vec3
    vel: Vec3
    acc: Vec3
    fac: Vec3
    inv_mass: float
    damp: float


@dataclass
class Particle:
    """A particle with position, velocity, constant acceleration and accumulated force."""

    position: Vec3 = field(default_factory=Vec3)
    velocity: Vec3 = field(default_factory=Vec3)
    acceleration: Vec3 = field(default_factory=Vec3)
    force_accum: Vec3 = field(default_factory=Vec3)
    inverse_mass: float = 1.0
    damping: float = 0.99
    radius: float = 1.0
    previous_position: Vec3 = field(default_factory=Vec3)
    initialized: bool = False

    @property
    def mass(self) -> float:
        """Mass of the particle; infinite when the inverse mass is zero."""
        if self.inverse_mass == 0:
            return math.inf
        return 1.0 / self.inverse_mass

    @mass.setter
    def mass(self, value: float) -> None:
        self.inverse_mass = math.inf if value == 0 else 1.0 / value

    def has_finite_mass(self) -> bool:
        return self.inverse_mass > 0.0

    def add_force(self, force: Vec3) -> None:
        self.force_accum = self.force_accum + force

    def clear_accumulator(self) -> None:
        self.force_accum = Vec3()

    def integrate(self, dt: float) -> None:
        """Advance by ``dt``: position from the old velocity, then damped velocity."""
        if self.inverse_mass <= 0.0:
            return
        self.position = self.position + self.velocity * dt
        resulting_acc = self.acceleration + self.force_accum * self.inverse_mass
        self.velocity = (self.velocity + resulting_acc * dt) * (self.damping**dt)
        self.clear_accumulator()

    def to_gpu(self) -> GpuParticle:
        return GpuParticle(
            pos=self.position.copy(),
            vel=self.velocity.copy(),
            acc=self.acceleration.copy(),
            fac=self.force_accum.copy(),
            inv_mass=float(self.inverse_mass),
            damp=float(self.damping),
        )