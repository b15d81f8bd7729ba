# MIT License (see LICENSE)
"""
Ready-made scenario setups.

- PROJECTILE_COMPARISON: two identical projectiles launched from the same
  point, one under Euler and one under RK4, to show integration error.
- ELASTIC_COLLISION: a box of randomly placed RK4 particles bouncing off the
  walls and each other.

Each setup clears the world first. Randomness goes through
numpy.random.default_rng so a seed reproduces the scene exactly.
"""
from __future__ import annotations
import logging
from enum import Enum

import numpy as np

from .types import Particle, IntegratorType
from .util import hsl_to_hex
from .world import World

logger = logging.getLogger(__name__)

COLOR_EULER = "#ff6b6b"
COLOR_RK4 = "#4ecdc4"

PROJECTILE_VELOCITY = (60.0, -85.0, -20.0)
PROJECTILE_MASS = 8.0
PROJECTILE_RADIUS = 12.0


class ScenarioType(Enum):
    PROJECTILE_COMPARISON = "projectile_comparison"
    ELASTIC_COLLISION = "elastic_collision"


def setup_projectile_comparison(world: World) -> tuple[Particle, Particle]:
    """
    Launch an Euler and an RK4 projectile from (50, height - 50, depth / 2).

    Both start with velocity (60, -85, -20) (up and to the right), mass 8 and
    radius 12. Particle 0 is Euler, particle 1 is RK4.

    Returns:
        (euler_particle, rk4_particle)
    """
    world.clear()
    start = (50.0, world.height - 50.0, world.depth / 2)

    euler = Particle(start, PROJECTILE_VELOCITY, PROJECTILE_MASS, PROJECTILE_RADIUS, COLOR_EULER)
    world.add_particle(euler, IntegratorType.EULER)

    rk4 = Particle(start, PROJECTILE_VELOCITY, PROJECTILE_MASS, PROJECTILE_RADIUS, COLOR_RK4)
    world.add_particle(rk4, IntegratorType.RK4)

    logger.info("Projectile comparison scenario ready")
    return euler, rk4


def setup_elastic_collisions(world: World, count: int = 20, seed: int | None = None) -> list[Particle]:
    """
    Scatter `count` RK4 particles in the upper half of the box.

    Radius r in [8, 16), mass 2r, position within 50 units of the side walls,
    velocity components in [-75, 75).
    """
    world.clear()
    rng = np.random.default_rng(seed)

    added = []
    for _ in range(count):
        r = 8.0 + 8.0 * rng.random()
        position = (
            rng.random() * (world.width - 100.0) + 50.0,
            rng.random() * (world.height / 2) + 50.0,
            rng.random() * (world.depth - 100.0) + 50.0,
        )
        velocity = tuple((rng.random(3) - 0.5) * 150.0)
        color = hsl_to_hex(rng.random() * 360.0, 0.7, 0.65)

        p = Particle(position, velocity, mass=2.0 * r, radius=r, color=color)
        world.add_particle(p, IntegratorType.RK4)
        added.append(p)

    logger.info("Elastic collision scenario ready (%d particles, seed=%s)", count, seed)
    return added


def setup_scenario(world: World, scenario: ScenarioType | str, **kwargs) -> list[Particle]:
    """
    Dispatch to the setup function for a scenario.

    Returns:
        The particles added, in insertion order.
    """
    scenario = ScenarioType(scenario)
    if scenario is ScenarioType.PROJECTILE_COMPARISON:
        return list(setup_projectile_comparison(world, **kwargs))
    return setup_elastic_collisions(world, **kwargs)
