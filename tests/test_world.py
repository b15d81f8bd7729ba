import logging

import numpy as np
import pytest
from particle_sim.config import SimulationConfig
from particle_sim.core.invariants import mechanical_energy
from particle_sim.profiler import Profiler
from particle_sim.scenarios import setup_projectile_comparison
from particle_sim.types import Particle, IntegratorType, ProbeState
from particle_sim.vector import Vector3
from particle_sim.world import World

NO_FORCES = SimulationConfig(gravity=0.0, restitution=0.8, time_step=0.01, drag_coefficient=0.0)


@pytest.mark.parametrize("dims", [(0, 400, 400), (600, -1, 400), (600, 400, 0)])
def test_non_positive_dimensions_rejected(dims):
    with pytest.raises(ValueError):
        World(*dims)


def test_config_type_checked():
    with pytest.raises(TypeError):
        World(600, 400, 400, config={"gravity": 9.8})
    world = World(600, 400, 400)
    with pytest.raises(TypeError):
        world.config = {"gravity": 0.0}


def test_non_positive_time_step_rejected():
    with pytest.raises(ValueError):
        SimulationConfig(time_step=0.0)
    world = World(600, 400, 400)
    with pytest.raises(ValueError):
        world.configure(time_step=-0.01)
    assert world.config.time_step == 0.016


def test_insert_assigns_unique_increasing_ids_in_order():
    world = World(600, 400, 400)
    a, b, c = Particle(), Particle(), Particle()
    ids = [world.add_particle(a, IntegratorType.EULER),
           world.add_particle(b, "rk4"),
           world.add_particle(c, IntegratorType.RK4)]

    assert ids == sorted(ids) and len(set(ids)) == 3
    assert world.particles == (a, b, c)
    assert [p.id for p in world.particles] == ids
    assert [p.integrator for p in world.particles] == [
        IntegratorType.EULER, IntegratorType.RK4, IntegratorType.RK4
    ]


def test_ids_not_reused_after_clear():
    world = World(600, 400, 400)
    first = world.add_particle(Particle(), IntegratorType.EULER)
    world.clear()
    second = world.add_particle(Particle(), IntegratorType.EULER)
    assert second > first


def test_insert_rejects_unknown_integrator():
    world = World(600, 400, 400)
    with pytest.raises(ValueError):
        world.add_particle(Particle(), "verlet")

    assert world.particles == ()


def test_double_insert_rejected():
    world = World(600, 400, 400)
    p = Particle()
    world.add_particle(p, IntegratorType.EULER)
    with pytest.raises(ValueError):
        world.add_particle(p, IntegratorType.RK4)
    with pytest.raises(ValueError):
        World(600, 400, 400).add_particle(p, IntegratorType.EULER)
    assert len(world.particles) == 1
    assert p.integrator is IntegratorType.EULER


def test_clone_cannot_join_a_world():
    world = World(600, 400, 400)
    p = Particle(position=(100.0, 100.0, 100.0))
    world.add_particle(p, IntegratorType.EULER)

    with pytest.raises(ValueError, match="Clones"):
        world.add_particle(p.clone(), IntegratorType.RK4)
    with pytest.raises(ValueError, match="Clones"):
        World(600, 400, 400).add_particle(Particle().clone(), IntegratorType.EULER)
    assert world.particles == (p,)


def test_inserted_particle_keeps_positive_mass_and_radius():
    """Overlapping pair: a zero mass would divide by zero in the impulse."""
    world = World(600, 400, 400)
    a = Particle(position=(100.0, 100.0, 100.0), velocity=(1.0, 0.0, 0.0))
    b = Particle(position=(105.0, 100.0, 100.0))
    world.add_particle(a, IntegratorType.EULER)
    world.add_particle(b, IntegratorType.RK4)

    with pytest.raises(ValueError, match="mass"):
        a.mass = 0.0
    with pytest.raises(ValueError, match="radius"):
        b.radius = -1.0
    assert (a.mass, b.radius) == (1.0, 10.0)

    world.step()
    assert world.step_count == 1
    assert a.position.distance(b.position) >= 20.0 - 1e-9


@pytest.mark.parametrize("method", [IntegratorType.EULER, IntegratorType.RK4])
def test_free_particle_moves_in_straight_line(method):
    """With g = 0 and drag = 0 velocity is constant and x(t) = x0 + v t."""
    world = World(600, 400, 400, NO_FORCES)
    v = Vector3(30.0, -20.0, 10.0)
    p = Particle(position=(300.0, 200.0, 200.0), velocity=v, radius=5.0)
    world.add_particle(p, method)

    for _ in range(100):
        world.step()

    assert p.velocity == v
    expected = np.array([300.0, 200.0, 200.0]) + v.to_array() * world.time
    assert np.allclose(p.position.to_array(), expected)


def test_clear_is_idempotent():
    world = World(600, 400, 400)
    world.add_particle(Particle(position=(100.0, 100.0, 100.0)), IntegratorType.EULER)
    world.step()
    world.step()

    world.clear()
    assert world.particles == ()
    assert world.time == 0.0
    assert world.step_count == 0

    world.clear()
    assert world.particles == ()
    assert world.time == 0.0

    # A cleared world steps normally from t = 0
    world.step()
    assert world.time == world.config.time_step
    assert world.step_count == 1


def test_time_advances_by_time_step():
    world = World(600, 400, 400, SimulationConfig(time_step=0.25))
    for _ in range(4):
        world.step()
    assert world.time == 1.0
    assert world.step_count == 4


def test_energy_decreases_bounce_to_bounce():
    """
    A ball dropped from rest with e < 1 and no drag loses energy at every
    floor contact, so mechanical energy at successive apexes strictly drops.
    """
    g = 9.8
    world = World(600, 400, 400, SimulationConfig(gravity=g, restitution=0.8, time_step=0.01))
    ball = Particle(position=(300.0, 100.0, 200.0), velocity=(0.0, 0.0, 0.0), mass=1.0, radius=10.0)
    world.add_particle(ball, IntegratorType.RK4)

    apex_energies = [mechanical_energy(ball, g, world.height)]
    prev_vy = ball.velocity.y
    for _ in range(6000):
        world.step()
        vy = ball.velocity.y
        # Rising (vy < 0) turning into falling (vy >= 0)
        if prev_vy < 0 <= vy:
            apex_energies.append(mechanical_energy(ball, g, world.height))
            if len(apex_energies) == 4:
                break
        prev_vy = vy

    print("apex energies", apex_energies)
    assert len(apex_energies) == 4
    assert all(later < earlier for earlier, later in zip(apex_energies, apex_energies[1:]))


def test_rk4_tracks_analytic_trajectory_better_than_euler():
    """
    Projectile comparison at t = 1:
      y(t) = y0 + vy0 t + 1/2 g t^2
    Euler lags by about g dt t / 2; RK4 is exact for constant gravity.
    """
    g, dt = 9.8, 0.01
    world = World(600, 400, 400, SimulationConfig(gravity=g, restitution=0.8, time_step=dt))
    euler, rk4 = setup_projectile_comparison(world)
    y0 = world.height - 50.0
    vy0 = -85.0

    for _ in range(100):
        world.step()

    t = world.time
    y_exact = y0 + vy0 * t + 0.5 * g * t * t
    euler_err = abs(euler.position.y - y_exact)
    rk4_err = abs(rk4.position.y - y_exact)
    print("euler err", euler_err, "rk4 err", rk4_err)

    assert rk4_err < euler_err
    assert rk4_err < 1e-6
    assert euler_err == pytest.approx(0.5 * g * dt * t, rel=0.05)


class CountingWorld(World):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.particle_calls = 0
        self.probe_calls = 0

    def environmental_forces(self, state):
        if isinstance(state, ProbeState):
            self.probe_calls += 1
        else:
            self.particle_calls += 1
        return super().environmental_forces(state)


@pytest.mark.parametrize("method, probes", [(IntegratorType.EULER, 0), (IntegratorType.RK4, 4)])
def test_force_evaluations_per_step(method, probes):
    """One accumulator evaluation per particle, plus four probes under RK4."""
    world = CountingWorld(600, 400, 400)
    world.add_particle(Particle(position=(300.0, 200.0, 200.0)), method)

    world.step()
    assert world.particle_calls == 1
    assert world.probe_calls == probes

    world.step()
    assert world.particle_calls == 2
    assert world.probe_calls == 2 * probes


def test_config_change_applies_on_next_step():
    world = World(600, 400, 400, SimulationConfig(gravity=9.8, time_step=0.01))
    p = Particle(position=(300.0, 100.0, 200.0))
    world.add_particle(p, IntegratorType.EULER)

    world.step()
    assert p.velocity.y == pytest.approx(0.098)

    world.configure(gravity=0.0)
    v_before = p.velocity
    world.step()
    assert p.velocity == v_before


def test_drag_slows_particle():
    world = World(600, 400, 400, SimulationConfig(gravity=0.0, drag_coefficient=0.5, time_step=0.01))
    p = Particle(position=(300.0, 200.0, 200.0), velocity=(20.0, 0.0, 0.0), mass=1.0, radius=5.0)
    world.add_particle(p, IntegratorType.RK4)

    speeds = []
    for _ in range(50):
        world.step()
        speeds.append(p.velocity.magnitude())
    assert all(b < a for a, b in zip(speeds, speeds[1:]))
    assert p.velocity.x == pytest.approx(20.0 * np.exp(-0.5 * world.time), rel=1e-6)


def test_collisions_resolved_before_integration():
    """
    A particle left past the floor is clamped and reflected first, then
    integrated from the clamped state:
        y = (H - r) + (-e v) dt
    """
    e, dt, v = 0.8, 0.01, 50.0
    world = World(600, 400, 400, SimulationConfig(gravity=0.0, restitution=e, time_step=dt))
    p = Particle(position=(300.0, 395.0, 200.0), velocity=(0.0, v, 0.0), radius=10.0)
    world.add_particle(p, IntegratorType.EULER)

    world.step()

    assert p.velocity.y == pytest.approx(-e * v)
    assert p.position.y == pytest.approx(390.0 - e * v * dt)


def test_profiler_times_step_phases():
    profiler = Profiler()
    world = World(600, 400, 400, profiler=profiler)
    world.add_particle(Particle(position=(300.0, 200.0, 200.0)), IntegratorType.RK4)
    for _ in range(5):
        world.step()

    summary = profiler.stats.summary()
    assert set(summary) == {"collisions", "integrate"}
    assert summary["integrate"]["n"] == 5
    assert summary["collisions"]["total_ms"] >= 0.0

    profiler.reset()
    assert profiler.stats.summary() == {}


def test_clear_is_logged(caplog):
    world = World(600, 400, 400)
    world.add_particle(Particle(), IntegratorType.EULER)
    with caplog.at_level(logging.INFO, logger="particle_sim.world"):
        world.clear()
    assert "World cleared (1 particles removed)" in caplog.text
