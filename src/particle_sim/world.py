# MIT License (see LICENSE)
"""
The simulation world and its fixed-timestep step.

The World owns:
- The bounding box (width, height, depth), fixed at construction.
- The SimulationConfig (gravity, restitution, timestep, drag), replaceable
  at any time; the new values apply from the next step.
- The ordered particle collection. Insertion order is observable
  (analytics refer to "particle 0" and "particle 1").
- Elapsed simulation time, advanced only by step() and reset only by clear().

Step order:
    1. Resolve collisions against the positions left by the previous step
       (walls first, then particle pairs).
    2. For each particle, in insertion order:
         clear_forces -> apply environmental forces -> integrate
       RK4 particles re-probe environmental_forces at intermediate states.
    3. time += time_step

Resolving collisions before integration means a fast particle (or a large
timestep) can still tunnel through a wall or another particle within a single
step. This is a known limitation and the resulting trajectories are relied on.

Threading: single writer. Exactly one caller may step, insert, clear or
replace the config; there is no internal locking.
"""
from __future__ import annotations
import logging
from contextlib import nullcontext
from dataclasses import replace

from .config import SimulationConfig
from .core.forces import environmental_force, KinematicState
from .core.integrators import integrate
from .collision.contact import Contact, resolve_particle_collisions
from .collision.walls import resolve_wall_collisions
from .profiler import Profiler
from .types import Particle, IntegratorType
from .vector import Vector3

logger = logging.getLogger(__name__)


class World:
    """
    Bounded 3D particle world.

    Attributes:
        profiler: Optional Profiler timing the "collisions" and "integrate"
                  phases of each step.
    """

    def __init__(
        self,
        width: float,
        height: float,
        depth: float,
        config: SimulationConfig | None = None,
        profiler: Profiler | None = None,
    ) -> None:
        for name, value in (("width", width), ("height", height), ("depth", depth)):
            if not value > 0:
                raise ValueError(f"World {name} must be positive, got {value}")
        self._width = float(width)
        self._height = float(height)
        self._depth = float(depth)
        self._config = self._check_config(config if config is not None else SimulationConfig())
        self.profiler = profiler

        self._particles: list[Particle] = []
        self._time = 0.0
        self._step_count = 0
        # Ids are never reused for the lifetime of the world, not even after clear().
        self._next_id = 1

        logger.debug(
            "World created %gx%gx%g with %s", self._width, self._height, self._depth, self._config
        )

    # -------------------------------------------------------------------------
    # Read-only surface
    # -------------------------------------------------------------------------

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        """Floor plane (Y grows downward)."""
        return self._height

    @property
    def depth(self) -> float:
        return self._depth

    @property
    def bounds(self) -> tuple[float, float, float]:
        return (self._width, self._height, self._depth)

    @property
    def particles(self) -> tuple[Particle, ...]:
        """Particles in insertion order."""
        return tuple(self._particles)

    @property
    def time(self) -> float:
        """Elapsed simulation time in seconds."""
        return self._time

    @property
    def step_count(self) -> int:
        """Number of steps since construction or the last clear()."""
        return self._step_count

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    @property
    def config(self) -> SimulationConfig:
        return self._config

    @config.setter
    def config(self, config: SimulationConfig) -> None:
        self._config = self._check_config(config)
        logger.debug("Config replaced: %s", config)

    def configure(self, **changes: float) -> SimulationConfig:
        """
        Replace the config with a copy that has some fields changed.

        Example:
            world.configure(gravity=0.0, restitution=1.0)
        """
        self.config = replace(self._config, **changes)
        return self._config

    @staticmethod
    def _check_config(config: SimulationConfig) -> SimulationConfig:
        if not isinstance(config, SimulationConfig):
            raise TypeError(f"Expected SimulationConfig, got {type(config).__name__}")
        return config

    # -------------------------------------------------------------------------
    # Population
    # -------------------------------------------------------------------------

    def add_particle(self, particle: Particle, integrator: IntegratorType | str) -> int:
        """
        Append a particle and bind its integration method.

        Args:
            particle: Fully initialized particle. Must not already belong to
                      a world and must not come from Particle.clone().
            integrator: IntegratorType or its string value ("euler", "rk4").

        Returns:
            The id assigned to the particle.

        Raises:
            ValueError: If the particle is a clone or was already inserted,
                        or the integrator name is unknown.
        """
        if particle.is_clone:
            raise ValueError("Clones are snapshots and cannot be added to a World")
        if particle.id != -1 or particle.integrator is not None:
            raise ValueError(f"Particle {particle.id} already belongs to a world")

        method = IntegratorType(integrator)
        particle.id = self._next_id
        self._next_id += 1
        particle.bind_integrator(method)
        self._particles.append(particle)

        logger.debug("Added particle %d (%s)", particle.id, method.value)
        return particle.id

    def clear(self) -> None:
        """
        Remove all particles and reset elapsed time.

        Integrator bindings live on the dropped particles and go with them.
        """
        dropped = len(self._particles)
        self._particles, self._time, self._step_count = [], 0.0, 0
        logger.info("World cleared (%d particles removed)", dropped)

    # -------------------------------------------------------------------------
    # Physics
    # -------------------------------------------------------------------------

    def environmental_forces(self, state: KinematicState) -> Vector3:
        """
        Total gravity + drag force on a particle or probe state.

        Pure and re-entrant: reads only the state and the current config.
        """
        return environmental_force(state, self._config)

    def resolve_collisions(self) -> list[Contact]:
        """
        Resolve wall collisions, then particle-particle collisions.

        Returns:
            The particle-particle contacts resolved in this pass.
        """
        e = self._config.restitution
        resolve_wall_collisions(self._particles, self.bounds, e)
        return resolve_particle_collisions(self._particles, e)

    def step(self) -> None:
        """Advance the simulation by one fixed timestep."""
        dt = self._config.time_step

        with self._section("collisions"):
            self.resolve_collisions()

        with self._section("integrate"):
            for p in self._particles:
                p.clear_forces()
                p.apply_force(self.environmental_forces(p))
                integrate(p, dt, self.environmental_forces)

        self._time += dt
        self._step_count += 1

    def _section(self, name: str):
        if self.profiler is None:
            return nullcontext()
        return self.profiler.section(name)

    def __repr__(self) -> str:
        return (
            f"World({self._width:g}x{self._height:g}x{self._depth:g}, "
            f"particles={len(self._particles)}, t={self._time:.4f})"
        )
