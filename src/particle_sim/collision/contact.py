# MIT License (see LICENSE)
"""
Sphere-sphere contact detection and resolution.

Resolution is a single impulse per contact, applied in two ordered stages:
1. Positional correction: each particle is pushed half the overlap apart
   along the contact normal. This runs before any velocity change so that
   overlapping pairs cannot "sink" into each other and gain energy.
2. Velocity resolution: a restitution impulse along the normal, skipped
   when the pair is already separating. Tangential velocity is untouched
   (frictionless).

Impulse derivation, with n pointing from a to b and vn = (v_b - v_a) . n:
    j = -(1 + e) * vn / (1/m_a + 1/m_b)
    v_a' = v_a - j n / m_a
    v_b' = v_b + j n / m_b

The denominator is always positive since every particle has mass > 0.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence

from ..constants import FALLBACK_NORMAL
from ..types import Particle
from ..vector import Vector3


@dataclass
class Contact:
    """
    A detected overlap between two particles.

    Attributes:
        a: First particle (lower index in the world's collection).
        b: Second particle.
        normal: Unit normal from a toward b.
        penetration: Overlap depth, (r_a + r_b) - distance. Always > 0.
        impulse: Normal impulse magnitude applied (0 if separating).
    """
    a: Particle
    b: Particle
    normal: Vector3
    penetration: float
    impulse: float = 0.0


def sphere_sphere_contact(a: Particle, b: Particle) -> Contact | None:
    """
    Detect overlap between two spheres.

    Coincident centers produce the fallback normal (1, 0, 0) instead of a
    zero normal, so the pair still gets separated and the impulse still acts.

    Returns:
        Contact if the spheres overlap (distance < r_a + r_b), None otherwise.
    """
    dist = a.position.distance(b.position)
    min_dist = a.radius + b.radius
    if dist >= min_dist:
        return None

    normal = b.position.sub(a.position).normalize()
    if normal.magnitude_squared() == 0:
        normal = Vector3(*FALLBACK_NORMAL)

    return Contact(a=a, b=b, normal=normal, penetration=min_dist - dist)


def separate_contact(contact: Contact) -> None:
    """Move both particles half the penetration apart along the normal."""
    shift = contact.normal.mult(0.5 * contact.penetration)
    contact.a.position = contact.a.position.sub(shift)
    contact.b.position = contact.b.position.add(shift)


def apply_contact_impulse(contact: Contact, restitution: float) -> float:
    """
    Apply the restitution impulse along the contact normal.

    Returns:
        The impulse magnitude applied, or 0.0 if the pair was separating.
    """
    a, b = contact.a, contact.b
    n = contact.normal

    vn = b.velocity.sub(a.velocity).dot(n)
    if vn > 0:
        return 0.0

    j = -(1.0 + restitution) * vn / (1.0 / a.mass + 1.0 / b.mass)
    a.velocity = a.velocity.sub(n.mult(j / a.mass))
    b.velocity = b.velocity.add(n.mult(j / b.mass))
    contact.impulse = j
    return j


def resolve_particle_collisions(particles: Sequence[Particle], restitution: float) -> list[Contact]:
    """
    Detect and resolve every overlapping pair (i < j).

    O(N^2) naive check; intended for tens of particles. Pairs are visited in
    collection order, and each pair sees the positions and velocities left
    by earlier pairs in the same pass.

    Returns:
        Contacts resolved during this pass, in visiting order.
    """
    contacts = []
    n = len(particles)
    for i in range(n):
        for j in range(i + 1, n):
            c = sphere_sphere_contact(particles[i], particles[j])
            if c is None:
                continue
            separate_contact(c)
            apply_contact_impulse(c, restitution)
            contacts.append(c)
    return contacts
