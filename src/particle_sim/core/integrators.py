# MIT License (see LICENSE)
"""
Numerical integrators for particle motion.

Both integrators solve the translational equations of motion:
    dx/dt = v,         dv/dt = F(x, v)/m

Available integrators:
- euler_step: Explicit (forward) Euler. First order, O(dt) local error.
  Consumes the force accumulated once at the start of the step.
- rk4_step: Classical 4th-order Runge-Kutta. Re-evaluates the force
  function at every stage, so velocity-dependent forces (drag) are
  integrated to full order.

Reference:
    Runge-Kutta methods: https://en.wikipedia.org/wiki/Runge-Kutta_methods
    Euler method: https://en.wikipedia.org/wiki/Euler_method
"""
from __future__ import annotations
from typing import Callable, NamedTuple

from ..types import Particle, ProbeState, IntegratorType
from ..vector import Vector3

# Maps a kinematic state to the total force acting on it.
ForceFunction = Callable[[ProbeState], Vector3]


class Derivative(NamedTuple):
    """Time derivative of the state: (dx/dt, dv/dt)."""
    d_pos: Vector3
    d_vel: Vector3


def _evaluate(state: ProbeState, force_fn: ForceFunction) -> Derivative:
    """
    Derivatives at an arbitrary state.

    The force is recomputed from the state each call; nothing is cached.
    """
    force = force_fn(state)
    return Derivative(state.velocity, force.div(state.mass))


def euler_step(particle: Particle, dt: float) -> None:
    """
    Advance a particle by dt using explicit Euler.

    Update order:
        a = F / m             (F = force accumulated at step start)
        x(t+dt) = x(t) + v(t) * dt
        v(t+dt) = v(t) + a * dt

    Position uses the start-of-step velocity. Energy is not conserved on
    curved trajectories; under constant gravity the position lags the
    analytic parabola by g*dt*t/2.

    Args:
        particle: Particle to integrate (modified in-place).
        dt: Timestep in seconds.
    """
    particle.acceleration = particle.force.div(particle.mass)
    particle.position = particle.position.add(particle.velocity.mult(dt))
    particle.velocity = particle.velocity.add(particle.acceleration.mult(dt))


def rk4_step(particle: Particle, dt: float, force_fn: ForceFunction) -> None:
    """
    Advance a particle by dt using classical 4th-order Runge-Kutta.

    Derivatives are sampled at four states and combined with weights
    (1, 2, 2, 1)/6:
        k1 at (x, v)                              [t]
        k2 at (x + k1.dx dt/2, v + k1.dv dt/2)    [t + dt/2]
        k3 at (x + k2.dx dt/2, v + k2.dv dt/2)    [t + dt/2]
        k4 at (x + k3.dx dt,   v + k3.dv dt)      [t + dt]

    force_fn is called exactly four times, once per stage, on a fresh
    ProbeState. Holding the acceleration constant across stages would
    silently degrade the method to first order for velocity-dependent forces.

    After integration, particle.acceleration is set to force/mass from the
    start-of-step accumulator. This is for display only.

    Args:
        particle: Particle to integrate (modified in-place).
        dt: Timestep in seconds.
        force_fn: Returns the total force at a probed state.
    """
    x0 = particle.position
    v0 = particle.velocity
    m = particle.mass
    half = 0.5 * dt

    k1 = _evaluate(ProbeState(x0, v0, m), force_fn)
    k2 = _evaluate(
        ProbeState(x0.add(k1.d_pos.mult(half)), v0.add(k1.d_vel.mult(half)), m),
        force_fn,
    )
    k3 = _evaluate(
        ProbeState(x0.add(k2.d_pos.mult(half)), v0.add(k2.d_vel.mult(half)), m),
        force_fn,
    )
    k4 = _evaluate(
        ProbeState(x0.add(k3.d_pos.mult(dt)), v0.add(k3.d_vel.mult(dt)), m),
        force_fn,
    )

    # Weighted combination
    d_pos = k1.d_pos.add(k2.d_pos.mult(2)).add(k3.d_pos.mult(2)).add(k4.d_pos)
    d_vel = k1.d_vel.add(k2.d_vel.mult(2)).add(k3.d_vel.mult(2)).add(k4.d_vel)

    particle.position = x0.add(d_pos.mult(dt / 6.0))
    particle.velocity = v0.add(d_vel.mult(dt / 6.0))
    particle.acceleration = particle.force.div(m)


def integrate(particle: Particle, dt: float, force_fn: ForceFunction) -> IntegratorType:
    """
    Dispatch to the particle's bound integrator.

    A particle without a binding is integrated with Euler.

    Returns:
        The integrator actually used.
    """
    method = particle.integrator or IntegratorType.EULER
    if method is IntegratorType.RK4:
        rk4_step(particle, dt, force_fn)
    else:
        euler_step(particle, dt)
    return method
