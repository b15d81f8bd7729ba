# MIT License (see LICENSE)
"""
particle_sim - A fixed-timestep 3D particle physics kernel.

Point-mass spheres move inside a box under gravity and linear drag, are
integrated with explicit Euler or classical RK4 (chosen per particle), and
bounce off the walls and each other.

Main entry points:
    - World: The bounded simulation world; owns particles and config.
    - Particle: A sphere with mass, radius and kinematic state.
    - IntegratorType: EULER or RK4, bound per particle on insertion.
    - SimulationConfig: gravity, restitution, timestep, drag.
    - Vector3: Immutable 3D vector.

Submodules:
    - core: Force functions, integrators and energy/momentum invariants.
    - collision: Wall and sphere-sphere collision resolution.
    - driver: Fixed-timestep accumulator for frame loops.
    - sampling: Euler vs RK4 trajectory/energy samples.
    - scenarios: Ready-made scene setups.
    - renderer: Optional visualization adapters.

Example:
    from particle_sim import World, Particle, IntegratorType

    world = World(600, 400, 400)
    ball = Particle(position=(300, 100, 200), velocity=(0, 0, 0), mass=1.0, radius=10)
    world.add_particle(ball, IntegratorType.RK4)
    world.step()
"""
from .config import SimulationConfig, config_from_dict, load_config
from .types import Particle, IntegratorType, ProbeState
from .vector import Vector3
from .world import World
from .driver import FixedStepDriver

__version__ = "0.1.0"

__all__ = [
    # Core simulation
    "World",
    "Particle",
    "IntegratorType",
    "ProbeState",
    "Vector3",
    # Configuration
    "SimulationConfig",
    "config_from_dict",
    "load_config",
    # Driving
    "FixedStepDriver",
    "__version__",
]
