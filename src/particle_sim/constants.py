# MIT License (see LICENSE)
"""
Default values and fixed engine constants.

World units are arbitrary "pixels"; time is in seconds. Y grows downward,
so the floor is the plane y = height.
"""
from __future__ import annotations

# Default world box (width x height x depth).
DEFAULT_WIDTH: float = 600.0
DEFAULT_HEIGHT: float = 400.0
DEFAULT_DEPTH: float = 400.0

# Default physics configuration.
DEFAULT_GRAVITY: float = 9.8
DEFAULT_RESTITUTION: float = 0.8
DEFAULT_TIME_STEP: float = 0.016
DEFAULT_DRAG: float = 0.0

# Default particle properties.
DEFAULT_MASS: float = 1.0
DEFAULT_RADIUS: float = 10.0
DEFAULT_COLOR: str = "#3b82f6"

# Fixed-timestep driver: at most this many steps per external tick, and real
# frame time above MAX_FRAME_TIME is clamped before accumulation.
MAX_STEPS_PER_TICK: int = 10
MAX_FRAME_TIME: float = 0.1

# Contact normal used when two particle centers coincide exactly.
FALLBACK_NORMAL: tuple[float, float, float] = (1.0, 0.0, 0.0)
