"""Interchangeable integration schemes for particles."""

from __future__ import annotations

from abc import ABC, abstractmethod

from tachyon.particle import Particle


def _require_positive(dt: float) -> None:
    if dt <= 0.0:
        raise ValueError(f"time step must be positive, got {dt}")


class ParticleIntegrator(ABC):
    """Advances a particle's state by one time step."""

    @abstractmethod
    def integrate(self, p: Particle, dt: float) -> None:
        """Advance ``p`` by ``dt`` seconds."""


class EulerParticleIntegrator(ParticleIntegrator):
    """Explicit Euler with damping; immovable particles are skipped."""

    def integrate(self, p: Particle, dt: float) -> None:
        _require_positive(dt)
        if p.inverse_mass <= 0.0:
            return
        p.position = p.position + p.velocity * dt
        resulting_acc = p.acceleration + p.force_accum * p.inverse_mass
        p.velocity = p.velocity + resulting_acc * dt
        p.velocity = p.velocity * (p.damping**dt)
        p.clear_accumulator()


class VerletParticleIntegrator(ParticleIntegrator):
    """Position Verlet driven by the particle's constant acceleration."""

    def integrate(self, p: Particle, dt: float) -> None:
        _require_positive(dt)
        if not p.initialized:
            p.previous_position = p.position - p.velocity * dt
            p.initialized = True
        current = p.position
        p.position = current + (current - p.previous_position) + p.acceleration * dt * dt
        p.previous_position = current