"""Narrow-phase collision detection producing contacts from candidate pairs."""

from __future__ import annotations

import math
from typing import Iterable

from tachyon.contact import Contact
from tachyon.matrix3 import Matrix3
from tachyon.rigid_body import RigidBody, ShapeType
from tachyon.shapes import Box
from tachyon.vec3 import Vec3

_SAT_EPSILON = 1e-6
_DEGENERATE_NORMAL_SQ = 1e-8
_MAX_SPHERE_BOX_PENETRATION = 10.0


class ContactGenerator:
    """Turns broad-phase pairs into contacts for sphere and box bodies."""

    def generate_contacts(self, pairs: Iterable[tuple[RigidBody, RigidBody]]) -> list[Contact]:
        """Return one contact for every pair whose shapes actually touch."""
        contacts = []
        for a, b in pairs:
            contact = self._detect(a, b)
            if contact is not None:
                contacts.append(contact)
        return contacts

    def _detect(self, a: RigidBody, b: RigidBody) -> Contact | None:
        kinds = (a.shape_type, b.shape_type)
        if kinds == (ShapeType.SPHERE, ShapeType.SPHERE):
            return self._sphere_sphere(a, b)
        if kinds == (ShapeType.SPHERE, ShapeType.BOX):
            return self._sphere_box(a, b)
        if kinds == (ShapeType.BOX, ShapeType.SPHERE):
            contact = self._sphere_box(b, a)
            if contact is not None:
                contact.body_a, contact.body_b = contact.body_b, contact.body_a
                contact.contact_normal = -contact.contact_normal
            return contact
        if kinds == (ShapeType.BOX, ShapeType.BOX):
            return self._box_box(a, b)
        return None

    @staticmethod
    def _sphere_sphere(a: RigidBody, b: RigidBody) -> Contact | None:
        offset = b.pos - a.pos
        distance = offset.magnitude()
        radius_sum = a.bounding_radius + b.bounding_radius
        if distance >= radius_sum:
            return None
        normal = offset / distance if distance > 0.0 else Vec3(1.0, 0.0, 0.0)
        penetration = radius_sum - distance
        return Contact(
            body_a=a,
            body_b=b,
            contact_point=a.pos + normal * (a.bounding_radius - 0.5 * penetration),
            contact_normal=normal,
            penetration=penetration,
            restitution=0.8,
            friction=0.0,
        )

    @staticmethod
    def _sphere_box(sphere: RigidBody, box: Box) -> Contact | None:
        local_center = box.to_local(sphere.pos)
        half = box.half_extents
        radius = sphere.bounding_radius

        if any(abs(c) - radius > h for c, h in zip(local_center, half)):
            return None

        closest = Vec3(*(min(max(c, -h), h) for c, h in zip(local_center, half)))
        dist_sq = (closest - local_center).magnitude_squared()
        if dist_sq > radius * radius:
            return None

        closest_world = box.to_world(closest)
        normal = sphere.pos - closest_world
        if normal.magnitude_squared() < _DEGENERATE_NORMAL_SQ or not all(
            math.isfinite(c) for c in normal
        ):
            normal = Vec3(1.0, 0.0, 0.0)
        else:
            normal.normalize()

        penetration = max(0.0, radius - math.sqrt(dist_sq))
        if not math.isfinite(penetration) or penetration > _MAX_SPHERE_BOX_PENETRATION:
            return None

        if normal.dot(sphere.pos - box.pos) < 0:
            normal = -normal

        return Contact(
            body_a=box,
            body_b=sphere,
            contact_point=closest_world,
            contact_normal=normal,
            penetration=penetration,
            restitution=0.9,
            friction=0.0,
        )

    def _box_box(self, a: Box, b: Box) -> Contact | None:
        rot_a = a.orient.to_matrix3()
        rot_b = b.orient.to_matrix3()
        he_a = a.half_extents
        he_b = b.half_extents

        r = Matrix3(*(rot_a.column(i).dot(rot_b.column(j)) for i in range(3) for j in range(3)))
        t = rot_a.transpose() @ (b.pos - a.pos)
        abs_r = Matrix3(*(abs(r[i, j]) + _SAT_EPSILON for i in range(3) for j in range(3)))

        for i in range(3):
            rb = sum(he_b[k] * abs_r[i, k] for k in range(3))
            if abs(t[i]) > he_a[i] + rb:
                return None

        for i in range(3):
            ra = sum(he_a[k] * abs_r[k, i] for k in range(3))
            projected = sum(t[k] * r[k, i] for k in range(3))
            if abs(projected) > ra + he_b[i]:
                return None

        for i in range(3):
            i1, i2 = (i + 1) % 3, (i + 2) % 3
            for j in range(3):
                j1, j2 = (j + 1) % 3, (j + 2) % 3
                ra = he_a[i1] * abs_r[i2, j] + he_a[i2] * abs_r[i1, j]
                rb = he_b[j1] * abs_r[i, j2] + he_b[j2] * abs_r[i, j1]
                if abs(t[i2] * r[i1, j] - t[i1] * r[i2, j]) > ra + rb:
                    return None

        return Contact(
            body_a=a,
            body_b=b,
            contact_point=self._box_box_contact_point(a, b),
            contact_normal=(b.pos - a.pos).normalized(),
            penetration=0.01,
            restitution=0.8,
            friction=0.3,
        )

    @staticmethod
    def _box_box_contact_point(a: Box, b: Box) -> Vec3:
        """Midpoint between the corners of each box that face the other box."""
        rot_a = a.orient.to_matrix3()
        rot_b = b.orient.to_matrix3()
        direction = (b.pos - a.pos).normalized()

        def facing_corner(rot: Matrix3, half: Vec3) -> Vec3:
            return Vec3(
                *(h if direction.dot(rot.column(i)) > 0 else -h for i, h in enumerate(half))
            )

        corner_a = a.pos + rot_a @ facing_corner(rot_a, a.half_extents)
        corner_b = b.pos - rot_b @ facing_corner(rot_b, b.half_extents)
        return (corner_a + corner_b) * 0.5