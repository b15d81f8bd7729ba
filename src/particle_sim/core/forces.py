# MIT License (see LICENSE)
"""
Environmental force generators.

Unlike in-place accumulators, every function here is pure: it reads a
state (a Particle or a ProbeState, anything with position, velocity and
mass) and returns a force Vector3. That makes them safe to call both on
real particles and on the hypothetical RK4 intermediate states.

Sign convention: world Y grows downward, so gravity points along +Y.
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Protocol

from ..vector import Vector3

if TYPE_CHECKING:
    from ..config import SimulationConfig


class KinematicState(Protocol):
    """What a force function needs to know about a body."""
    position: Vector3
    velocity: Vector3
    mass: float


def gravity_force(state: KinematicState, g: float) -> Vector3:
    """
    Weight of the body: F = (0, m g, 0).

    Args:
        state: Body state. Only mass is read.
        g: Gravitational acceleration magnitude (positive = downward).
    """
    return Vector3(0.0, g * state.mass, 0.0)


def linear_drag_force(state: KinematicState, c: float) -> Vector3:
    """
    Linear drag opposing motion: F = -c |v| v_hat.

    Returns the zero vector if c <= 0 or the body is at rest.

    Args:
        state: Body state. Only velocity is read.
        c: Drag coefficient.
    """
    if c <= 0:
        return Vector3.zero()
    speed = state.velocity.magnitude()
    if speed == 0:
        return Vector3.zero()
    return state.velocity.normalize().mult(-c * speed)


def environmental_force(state: KinematicState, config: "SimulationConfig") -> Vector3:
    """
    Total environmental force on a body for the given configuration.

    Gravity and drag are summed. Side-effect free and re-entrant.
    """
    total = gravity_force(state, config.gravity)
    total = total.add(linear_drag_force(state, config.drag_coefficient))
    return total
