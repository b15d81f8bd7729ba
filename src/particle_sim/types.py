# MIT License (see LICENSE)
"""
Core type definitions for the particle simulation.

Defines the fundamental data structures:
- IntegratorType: the per-particle integration method (Euler | RK4).
- ProbeState: an immutable (position, velocity, mass) snapshot used to
  evaluate forces at hypothetical states during RK4.
- Particle: the simulated entity, a point-mass sphere.

Equations of motion (translation only, no rotation):
  dx/dt = v
  dv/dt = F/m
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum

from .constants import DEFAULT_MASS, DEFAULT_RADIUS, DEFAULT_COLOR
from .vector import Vector3, as_vector3


class IntegratorType(str, Enum):
    """Integration method bound to a particle when it enters a World."""
    EULER = "euler"
    RK4 = "rk4"

    @property
    def label(self) -> str:
        """Human readable name for legends and logs."""
        return "Euler" if self is IntegratorType.EULER else "Runge-Kutta 4"


@dataclass(frozen=True)
class ProbeState:
    """
    Kinematic state to evaluate forces at, without touching a real particle.

    Force functions only read position, velocity and mass, so both a Particle
    and a ProbeState can be passed to them.
    """
    position: Vector3
    velocity: Vector3
    mass: float


@dataclass
class Particle:
    """
    A point-mass sphere with kinematic state and a force accumulator.

    Attributes:
        position: Center position.
        velocity: Linear velocity.
        mass: Mass, must be > 0.
        radius: Sphere radius used for collisions (and rendering), must be > 0.
        color: Cosmetic color string, ignored by the physics.
        acceleration: Last computed acceleration (display only).
        force: Force accumulator. Reset at the start of each step, summed
               into during force accumulation, consumed by the integrator.
        id: Identifier assigned by World.add_particle(); -1 until inserted.

    Note:
        Position and velocity accept tuples, lists or numpy arrays and are
        converted to Vector3 on init.
    """
    position: Vector3 = field(default_factory=Vector3.zero)
    velocity: Vector3 = field(default_factory=Vector3.zero)
    mass: float = DEFAULT_MASS
    radius: float = DEFAULT_RADIUS
    color: str = DEFAULT_COLOR

    # Runtime state (not user-specified)
    acceleration: Vector3 = field(default_factory=Vector3.zero)
    force: Vector3 = field(default_factory=Vector3.zero)
    id: int = -1
    _integrator: IntegratorType | None = field(default=None, init=False, repr=False)
    _is_clone: bool = field(default=False, init=False, repr=False)

    def __setattr__(self, name: str, value) -> None:
        # Checked on every assignment, __init__ included.
        if name in ("mass", "radius") and not value > 0:
            raise ValueError(f"Particle {name} must be positive, got {value}")
        super().__setattr__(name, value)

    def __post_init__(self) -> None:
        """Normalize vector inputs. mass/radius are checked on assignment."""
        self.position = as_vector3(self.position)
        self.velocity = as_vector3(self.velocity)
        self.acceleration = as_vector3(self.acceleration)
        self.force = as_vector3(self.force)

    @property
    def integrator(self) -> IntegratorType | None:
        """Integrator bound at insertion, or None for a particle outside a World."""
        return self._integrator

    def bind_integrator(self, integrator: IntegratorType) -> None:
        """
        Bind the integration method. Allowed exactly once.

        Raises:
            ValueError: If the particle is already bound.
        """
        if self._integrator is not None:
            raise ValueError(
                f"Particle {self.id} is already bound to {self._integrator.value}"
            )
        self._integrator = integrator

    @property
    def is_clone(self) -> bool:
        """True for copies made by clone(); these never enter a World."""
        return self._is_clone

    def apply_force(self, force: Vector3) -> None:
        """Add a force to the accumulator."""
        self.force = self.force.add(force)

    def clear_forces(self) -> None:
        """Reset the force accumulator and acceleration for the next step."""
        self.force = Vector3.zero()
        self.acceleration = Vector3.zero()

    def kinetic_energy(self) -> float:
        """T = 1/2 m |v|^2"""
        return 0.5 * self.mass * self.velocity.magnitude_squared()

    def potential_energy(self, gravity: float, floor_height: float) -> float:
        """
        Gravitational potential energy relative to the floor.

        Y grows downward, so the height above the floor is floor_height - y:
            U = m g (floor_height - y)
        """
        return self.mass * gravity * (floor_height - self.position.y)

    def probe_state(self) -> ProbeState:
        """Snapshot of the state force functions read."""
        return ProbeState(self.position, self.velocity, self.mass)

    def clone(self) -> Particle:
        """
        Independent copy of the physical state.

        The copy is unbound (id -1, no integrator) and flagged as a clone.
        It is a disposable snapshot: World.add_particle() rejects it.
        """
        copy = Particle(
            position=self.position,
            velocity=self.velocity,
            mass=self.mass,
            radius=self.radius,
            color=self.color,
            acceleration=self.acceleration,
            force=self.force,
        )
        copy._is_clone = True
        return copy
