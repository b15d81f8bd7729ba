import math
import re

import pytest
from particle_sim.config import SimulationConfig
from particle_sim.scenarios import (
    COLOR_EULER,
    COLOR_RK4,
    ScenarioType,
    setup_elastic_collisions,
    setup_projectile_comparison,
    setup_scenario,
)
from particle_sim.types import IntegratorType
from particle_sim.vector import Vector3
from particle_sim.world import World


def test_projectile_comparison_setup():
    world = World(600, 400, 400)
    world.step()

    euler, rk4 = setup_projectile_comparison(world)

    assert world.time == 0.0
    assert world.particles == (euler, rk4)
    assert euler.integrator is IntegratorType.EULER
    assert rk4.integrator is IntegratorType.RK4
    for p in (euler, rk4):
        assert p.position == Vector3(50.0, 350.0, 200.0)
        assert p.velocity == Vector3(60.0, -85.0, -20.0)
        assert p.mass == 8.0
        assert p.radius == 12.0
    assert (euler.color, rk4.color) == (COLOR_EULER, COLOR_RK4)


def test_elastic_collisions_setup_ranges():
    world = World(600, 400, 400)
    particles = setup_elastic_collisions(world, count=20, seed=7)

    assert len(world.particles) == 20
    assert list(world.particles) == particles
    for p in particles:
        assert p.integrator is IntegratorType.RK4
        assert 8.0 <= p.radius < 16.0
        assert p.mass == pytest.approx(2.0 * p.radius)
        assert 50.0 <= p.position.x < 550.0
        assert 50.0 <= p.position.y < 250.0
        assert 50.0 <= p.position.z < 350.0
        assert all(-75.0 <= v < 75.0 for v in p.velocity)
        assert re.fullmatch(r"#[0-9a-f]{6}", p.color)


def test_elastic_collisions_seed_reproducible():
    a = setup_elastic_collisions(World(600, 400, 400), count=5, seed=123)
    b = setup_elastic_collisions(World(600, 400, 400), count=5, seed=123)
    assert [(p.position, p.velocity, p.radius, p.color) for p in a] == [
        (p.position, p.velocity, p.radius, p.color) for p in b
    ]


def test_setup_scenario_dispatch():
    world = World(600, 400, 400)
    added = setup_scenario(world, "projectile_comparison")
    assert len(added) == 2

    added = setup_scenario(world, ScenarioType.ELASTIC_COLLISION, count=4, seed=1)
    assert len(added) == 4
    assert len(world.particles) == 4

    with pytest.raises(ValueError):
        setup_scenario(world, "galaxy")


def test_elastic_scene_stays_finite():
    world = World(600, 400, 400, SimulationConfig(gravity=9.8, restitution=0.8, time_step=0.016))
    setup_elastic_collisions(world, count=20, seed=42)

    for _ in range(300):
        world.step()

    assert len(world.particles) == 20
    for p in world.particles:
        assert all(math.isfinite(v) for v in p.position)
        assert all(math.isfinite(v) for v in p.velocity)
