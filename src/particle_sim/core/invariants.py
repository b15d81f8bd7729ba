# MIT License (see LICENSE)
"""
Utilities for calculating physical invariants and conserved quantities.

Used for verifying simulation correctness and for the analytics layer.
With gravity and drag off and restitution = 1, total kinetic energy and
linear momentum should stay constant (within integration error).
"""
from __future__ import annotations
from typing import Iterable

import numpy as np

from ..types import Particle


def kinetic_energy(particles: Iterable[Particle]) -> float:
    """
    Total kinetic energy of a set of particles.

    T = sum(0.5 * m * v^2)
    """
    return float(sum(p.kinetic_energy() for p in particles))


def potential_energy(particles: Iterable[Particle], gravity: float, floor_height: float) -> float:
    """
    Total gravitational potential energy relative to the floor.

    U = sum(m * g * (floor_height - y))
    """
    return float(sum(p.potential_energy(gravity, floor_height) for p in particles))


def mechanical_energy(particle: Particle, gravity: float, floor_height: float) -> float:
    """Kinetic plus potential energy of a single particle."""
    return particle.kinetic_energy() + particle.potential_energy(gravity, floor_height)


def linear_momentum(particles: Iterable[Particle]) -> np.ndarray:
    """
    Total linear momentum of a system.

    P = sum(m * v)

    Returns:
        Momentum vector [Px, Py, Pz].
    """
    p = np.zeros(3, dtype=np.float64)
    for b in particles:
        p += b.mass * b.velocity.to_array()
    return p
