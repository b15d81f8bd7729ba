# MIT License (see LICENSE)
"""
Collision detection and resolution subsystem.

This subpackage provides:
    - Walls: Clamp-and-reflect against the six faces of the world box.
    - Contact: Sphere-sphere overlap detection, positional correction and
      restitution impulses.

Typical usage:
    from particle_sim.collision import resolve_wall_collisions, resolve_particle_collisions

    resolve_wall_collisions(particles, (width, height, depth), restitution)
    contacts = resolve_particle_collisions(particles, restitution)
"""
from .walls import resolve_wall_collision, resolve_wall_collisions
from .contact import (
    Contact,
    sphere_sphere_contact,
    separate_contact,
    apply_contact_impulse,
    resolve_particle_collisions,
)

__all__ = [
    # Walls
    "resolve_wall_collision",
    "resolve_wall_collisions",
    # Contact
    "Contact",
    "sphere_sphere_contact",
    "separate_contact",
    "apply_contact_impulse",
    "resolve_particle_collisions",
]
