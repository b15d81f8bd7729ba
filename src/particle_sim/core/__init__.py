# MIT License (see LICENSE)
"""
Core physics components.

This subpackage provides:
    - Force generators: gravity and linear drag (pure functions).
    - Integrators: explicit Euler and classical RK4.
    - Invariants: energy and momentum totals.

Typical usage:
    from particle_sim.core import environmental_force, rk4_step

    rk4_step(particle, dt=0.016, force_fn=lambda s: environmental_force(s, config))
"""
from .forces import gravity_force, linear_drag_force, environmental_force
from .integrators import Derivative, euler_step, rk4_step, integrate
from .invariants import kinetic_energy, potential_energy, mechanical_energy, linear_momentum

__all__ = [
    # Forces
    "gravity_force",
    "linear_drag_force",
    "environmental_force",
    # Integrators
    "Derivative",
    "euler_step",
    "rk4_step",
    "integrate",
    # Invariants
    "kinetic_energy",
    "potential_energy",
    "mechanical_energy",
    "linear_momentum",
]
