# MIT License (see LICENSE)
"""
Fixed-timestep driver for embedding the World in a frame loop.

Real elapsed time accumulates here; World.step() is called a whole number of
times to consume it in units of config.time_step, and the remainder carries
over to the next tick. Work per tick is bounded two ways:
  - real_dt above max_frame_time is clamped (e.g. a backgrounded tab)
  - at most max_steps_per_tick steps run per tick; the rest stays in the
    accumulator rather than being caught up all at once
"""
from __future__ import annotations
import logging

from .constants import MAX_STEPS_PER_TICK, MAX_FRAME_TIME
from .world import World

logger = logging.getLogger(__name__)


class FixedStepDriver:
    """
    Accumulator-based stepping of a World.

    Example:
        driver = FixedStepDriver(world)
        while running:
            steps = driver.advance(frame_delta)
            renderer.render_world(world)
    """

    def __init__(
        self,
        world: World,
        max_steps_per_tick: int = MAX_STEPS_PER_TICK,
        max_frame_time: float = MAX_FRAME_TIME,
    ) -> None:
        if max_steps_per_tick < 1:
            raise ValueError(f"max_steps_per_tick must be >= 1, got {max_steps_per_tick}")
        if not max_frame_time > 0:
            raise ValueError(f"max_frame_time must be positive, got {max_frame_time}")
        self.world = world
        self.max_steps_per_tick = max_steps_per_tick
        self.max_frame_time = max_frame_time
        self.accumulator = 0.0

    def advance(self, real_dt: float) -> int:
        """
        Feed real elapsed time and run as many fixed steps as it covers.

        Args:
            real_dt: Real time since the previous call, in seconds.

        Returns:
            Number of World.step() calls made.
        """
        if real_dt < 0:
            raise ValueError(f"real_dt must be non-negative, got {real_dt}")

        self.accumulator += min(real_dt, self.max_frame_time)

        steps = 0
        while steps < self.max_steps_per_tick:
            # Read each iteration: the config may be replaced between ticks.
            dt = self.world.config.time_step
            if self.accumulator < dt:
                break
            self.world.step()
            self.accumulator -= dt
            steps += 1

        if steps == self.max_steps_per_tick and self.accumulator >= self.world.config.time_step:
            logger.warning(
                "Step cap of %d reached; %.4fs of simulation time deferred",
                self.max_steps_per_tick,
                self.accumulator,
            )
        return steps

    @property
    def alpha(self) -> float:
        """
        Interpolation factor toward the next step.

        In [0, 1) except after a tick that hit the step cap. Renderers can
        blend the previous and current state by this amount.
        """
        return self.accumulator / self.world.config.time_step

    def reset(self) -> None:
        """Discard any accumulated, unsimulated time."""
        self.accumulator = 0.0
