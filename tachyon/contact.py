"""Contact record produced by the narrow phase and consumed by the resolver."""

from __future__ import annotations

from dataclasses import dataclass, field

from tachyon.rigid_body import RigidBody
from tachyon.vec3 import Vec3


@dataclass
class Contact:
    """A single point of contact between two bodies; the normal points from A to B."""

    body_a: RigidBody | None = None
    body_b: RigidBody | None = None
    contact_point: Vec3 = field(default_factory=Vec3)
    contact_normal: Vec3 = field(default_factory=Vec3)
    penetration: float = 0.0
    restitution: float = 0.2
    friction: float = 0.0
    resolve_count: int = 0