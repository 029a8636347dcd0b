"""Impulse-based contact resolution with positional correction."""

from __future__ import annotations

from typing import Sequence

from tachyon.contact import Contact

_MAX_RESOLVES_PER_CONTACT = 5
_VELOCITY_EPSILON = 0.01
_BAUMGARTE_BETA = 0.2
_PENETRATION_SLOP = 0.01
_POSITION_BETA = 0.15
_PENETRATION_DECAY = 0.85


class ContactResolver:
    """Applies collision impulses and pushes overlapping bodies apart."""

    def resolve_contacts_simple(self, contacts: Sequence[Contact], duration: float) -> None:
        """Resolve every contact once, in the given order."""
        for contact in contacts:
            self._resolve_interpenetration(contact)
            self._resolve_velocity(contact, duration)

    def resolve_contacts_iterative(
        self, contacts: Sequence[Contact], duration: float, max_iterations: int
    ) -> None:
        """Repeatedly resolve the deepest contact, each at most a few times."""
        for _ in range(max_iterations):
            candidates = [
                c
                for c in contacts
                if c.resolve_count < _MAX_RESOLVES_PER_CONTACT and c.penetration > 0.0
            ]
            if not candidates:
                break
            deepest = max(candidates, key=lambda c: c.penetration)
            self._resolve_velocity(deepest, duration)
            self._resolve_interpenetration(deepest)
            deepest.resolve_count += 1

    @staticmethod
    def _resolve_velocity(contact: Contact, duration: float) -> None:
        a, b = contact.body_a, contact.body_b
        normal = contact.contact_normal
        ra = contact.contact_point - a.pos
        rb = contact.contact_point - b.pos
        va = a.vel + a.ang_vel.cross(ra)
        vb = b.vel + b.ang_vel.cross(rb)

        vel_along_normal = (vb - va).dot(normal)
        if vel_along_normal > -_VELOCITY_EPSILON:
            return

        inv_mass_sum = (
            a.inverse_mass
            + b.inverse_mass
            + normal.dot((a.inverse_inertia_world @ ra.cross(normal)).cross(ra))
            + normal.dot((b.inverse_inertia_world @ rb.cross(normal)).cross(rb))
        )
        if inv_mass_sum <= 0.0:
            return

        bias = _BAUMGARTE_BETA * max(contact.penetration - _PENETRATION_SLOP, 0.0) / duration
        j = -(vel_along_normal + bias) * (1 + contact.restitution) / inv_mass_sum
        impulse = normal * j

        a.vel = a.vel - impulse * a.inverse_mass
        b.vel = b.vel + impulse * b.inverse_mass
        a.ang_vel = a.ang_vel - a.inverse_inertia_world @ ra.cross(impulse)
        b.ang_vel = b.ang_vel + b.inverse_inertia_world @ rb.cross(impulse)

    @staticmethod
    def _resolve_interpenetration(contact: Contact) -> None:
        a, b = contact.body_a, contact.body_b
        total_inverse_mass = a.inverse_mass + b.inverse_mass
        if total_inverse_mass <= 0.0:
            return
        move = contact.contact_normal * (contact.penetration / total_inverse_mass)
        a.pos = a.pos - move * (_POSITION_BETA * a.inverse_mass)
        b.pos = b.pos + move * (_POSITION_BETA * b.inverse_mass)
        contact.penetration *= _PENETRATION_DECAY