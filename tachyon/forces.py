"""Force generators acting on point particles, and the registry entry format."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum

from tachyon.float3 import length, length_sq, normalize, scale, sub
from tachyon.point_particle import PointParticle
from tachyon.vec3 import Vec3

_PAIRWISE_SOFTENING = 1e-6


class ForceType(IntEnum):
    GRAVITY = 0
    DRAG = 1
    SPRING = 2
    ANCHORED_SPRING = 3
    BUNGEE = 4
    BUOYANCY = 5
    AERO = 6
    EXPLOSION = 7


@dataclass
class ForceEntry:
    """One registered force: which particle(s) it acts on and its parameters."""

    particle_index: int
    other_index: int
    type: ForceType
    vec_param: Vec3 = field(default_factory=Vec3)
    param1: float = 0.0
    param2: float = 0.0


def apply_gravity(p: PointParticle, gravity: Vec3) -> None:
    """Add the weight ``m * gravity`` to a particle of finite mass."""
    if p.has_finite_mass():
        p.add_force(scale(gravity, 1.0 / p.inv_mass))


def apply_drag(p: PointParticle, drag_coeff: float) -> None:
    """Add linear drag opposing the particle's velocity."""
    if p.has_finite_mass():
        p.add_force(scale(p.vel, -drag_coeff))


def _spring_force(delta: Vec3, rest_length: float, stiffness: float) -> Vec3:
    magnitude = -stiffness * (length(delta) - rest_length)
    return scale(normalize(delta), magnitude)


def apply_spring(p1: PointParticle, p2: PointParticle, rest_length: float, stiffness: float) -> None:
    """Hooke spring between two particles; only ``p1`` receives the force."""
    p1.add_force(_spring_force(sub(p1.pos, p2.pos), rest_length, stiffness))


def apply_anchored_spring(p: PointParticle, anchor: Vec3, rest_length: float, stiffness: float) -> None:
    """Hooke spring from ``p`` to a fixed point."""
    p.add_force(_spring_force(sub(p.pos, anchor), rest_length, stiffness))


def apply_bungee(p: PointParticle, anchor: PointParticle, rest_length: float, stiffness: float) -> None:
    """Spring that only pulls, acting when stretched beyond ``rest_length``."""
    delta = sub(p.pos, anchor.pos)
    if length(delta) <= rest_length:
        return
    p.add_force(_spring_force(delta, rest_length, stiffness))


def apply_buoyancy(
    p: PointParticle,
    fluid_height: float,
    max_depth: float,
    volume: float,
    liquid_density: float = 1000.0,
) -> None:
    """Upward buoyant force proportional to how far the particle is submerged."""
    depth = p.pos.y
    if depth >= fluid_height + max_depth:
        return
    if depth <= fluid_height - max_depth:
        buoyant_force = liquid_density * volume
    else:
        submersion = (fluid_height - depth + max_depth) / (2.0 * max_depth)
        buoyant_force = liquid_density * volume * submersion
    p.add_force(Vec3(0.0, buoyant_force, 0.0))


def apply_explosion(p: PointParticle, center: Vec3, radius: float, strength: float) -> None:
    """Radial push away from ``center``, fading linearly to zero at ``radius``."""
    offset = sub(p.pos, center)
    dist_sq = length_sq(offset)
    if dist_sq > radius * radius:
        return
    dist = math.sqrt(dist_sq)
    magnitude = strength * (1.0 - dist / radius)
    p.add_force(scale(normalize(offset), magnitude))


def apply_pairwise_gravity(a: PointParticle, b: PointParticle, g: float) -> None:
    """Attract ``a`` towards ``b`` with softened inverse-square gravity."""
    if not a.has_finite_mass():
        return
    if not b.has_finite_mass():
        raise ValueError("pairwise gravity needs a partner of finite mass")
    offset = sub(b.pos, a.pos)
    dist_sq = length_sq(offset) + _PAIRWISE_SOFTENING
    direction = scale(offset, 1.0 / math.sqrt(dist_sq))
    force_mag = g / dist_sq
    a.add_force(scale(direction, force_mag / (a.inv_mass * b.inv_mass)))