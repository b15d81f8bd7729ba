# MIT License (see LICENSE)
"""
Sampling of trajectory and energy data for analytics.

The comparison scenario runs the same projectile twice, particle 0 under
Euler and particle 1 under RK4. A ChartDataPoint captures, at one instant,
each particle's height above the floor and its total mechanical energy.
Plotting is left to the embedding application; SampleRecorder only keeps a
rolling window and exports it as numpy arrays.
"""
from __future__ import annotations
import logging
from collections import deque
from dataclasses import dataclass, fields

import numpy as np

from .core.invariants import mechanical_energy
from .world import World

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChartDataPoint:
    """
    One sample of the Euler vs RK4 comparison.

    Attributes:
        time: Simulation time of the sample.
        position_y_euler: Height above the floor of particle 0.
        position_y_rk4: Height above the floor of particle 1.
        energy_euler: KE + PE of particle 0.
        energy_rk4: KE + PE of particle 1.
    """
    time: float
    position_y_euler: float | None = None
    position_y_rk4: float | None = None
    energy_euler: float | None = None
    energy_rk4: float | None = None


def sample_comparison(world: World) -> ChartDataPoint:
    """
    Sample particles 0 and 1 of the world.

    Heights and potential energy are measured from the floor (y = height).
    With fewer than two particles only the time is filled in.
    """
    particles = world.particles
    if len(particles) < 2:
        return ChartDataPoint(time=world.time)

    euler, rk4 = particles[0], particles[1]
    g, floor = world.config.gravity, world.height
    return ChartDataPoint(
        time=world.time,
        position_y_euler=floor - euler.position.y,
        position_y_rk4=floor - rk4.position.y,
        energy_euler=mechanical_energy(euler, g, floor),
        energy_rk4=mechanical_energy(rk4, g, floor),
    )


class SampleRecorder:
    """
    Rolling window of ChartDataPoints taken every few steps.

    Args:
        world: World to sample.
        every: Sample when world.step_count is a positive multiple of this.
        maxlen: Window size; older points are dropped.
    """

    def __init__(self, world: World, every: int = 5, maxlen: int = 100) -> None:
        if every < 1:
            raise ValueError(f"every must be >= 1, got {every}")
        self.world = world
        self.every = every
        self.points: deque[ChartDataPoint] = deque(maxlen=maxlen)
        self._last_step = -1
        self._seen_step = -1

    def record(self) -> ChartDataPoint | None:
        """
        Take a sample if one is due.

        Safe to call every frame: a given step is sampled at most once. If the
        world was rewound (cleared or re-set up) since the previous call, the
        window is emptied first so old and new runs never mix.

        Returns:
            The new point, or None if no sample was due.
        """
        step = self.world.step_count
        if step < self._seen_step:
            logger.debug("World rewound from step %d to %d; samples dropped", self._seen_step, step)
            self.clear()
        self._seen_step = step

        if step == 0 or step % self.every != 0 or step == self._last_step:
            return None
        self._last_step = step
        point = sample_comparison(self.world)
        self.points.append(point)
        return point

    def as_arrays(self) -> dict[str, np.ndarray]:
        """
        Column arrays for every ChartDataPoint field.

        Missing values become NaN.
        """
        out = {}
        for f in fields(ChartDataPoint):
            values = [getattr(p, f.name) for p in self.points]
            out[f.name] = np.array(
                [np.nan if v is None else v for v in values], dtype=np.float64
            )
        return out

    def clear(self) -> None:
        self.points.clear()
        self._last_step = -1
        self._seen_step = -1

    def __len__(self) -> int:
        return len(self.points)
