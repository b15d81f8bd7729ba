# MIT License (see LICENSE)
"""
Collisions between particles and the walls of the world box.

The box spans [0, width] x [0, height] x [0, depth]. Each of the six walls
is checked independently. A particle whose sphere crosses a wall is clamped
so it is exactly tangent to it, and the velocity component along that axis
is reflected and scaled by restitution:

    v_axis' = v_axis * -e

Axes touch disjoint velocity components, so a particle in a corner bounces
off two or three walls in the same pass.
"""
from __future__ import annotations
from typing import Iterable

from ..types import Particle

# Check order: floor/ceiling, then right/left, then back/front.
_AXES = (1, 0, 2)


def resolve_wall_collision(
    particle: Particle,
    bounds: tuple[float, float, float],
    restitution: float,
) -> int:
    """
    Clamp a single particle inside the box and reflect its velocity.

    Args:
        particle: Particle to test (modified in-place).
        bounds: Box extents (width, height, depth).
        restitution: Coefficient of restitution for the reflection.

    Returns:
        Number of walls hit in this pass (0-6).
    """
    hits = 0
    r = particle.radius
    for axis in _AXES:
        limit = bounds[axis]

        # Max wall (floor for Y)
        if particle.position.component(axis) + r > limit:
            particle.position = particle.position.with_component(axis, limit - r)
            particle.velocity = particle.velocity.with_component(
                axis, particle.velocity.component(axis) * -restitution
            )
            hits += 1

        # Min wall (ceiling for Y)
        if particle.position.component(axis) - r < 0:
            particle.position = particle.position.with_component(axis, r)
            particle.velocity = particle.velocity.with_component(
                axis, particle.velocity.component(axis) * -restitution
            )
            hits += 1
    return hits


def resolve_wall_collisions(
    particles: Iterable[Particle],
    bounds: tuple[float, float, float],
    restitution: float,
) -> int:
    """
    Resolve wall collisions for every particle.

    Returns:
        Total number of wall hits.
    """
    return sum(resolve_wall_collision(p, bounds, restitution) for p in particles)
