# MIT License (see LICENSE)
"""
Simulation configuration record and loaders.

SimulationConfig is immutable; the embedding application tunes physics live
by replacing it wholesale on the World (World.config = ... or
World.configure(...)). The new values take effect on the next step.

Only the timestep is validated. Gravity, restitution and drag are taken at
face value: restitution > 1 injects energy and that is the expected result.

JSON Schema Overview:
---------------------
{
  "gravity": float,            # Default: 9.8 (positive = downward, +Y)
  "restitution": float,        # Default: 0.8
  "time_step": float,          # Default: 0.016, must be > 0 ("timeStep" also accepted)
  "drag_coefficient": float    # Default: 0.0 ("dragCoefficient" also accepted)
}
"""
from __future__ import annotations
import json
import logging
from dataclasses import dataclass, asdict
from typing import Any

from .constants import (
    DEFAULT_GRAVITY,
    DEFAULT_RESTITUTION,
    DEFAULT_TIME_STEP,
    DEFAULT_DRAG,
)

logger = logging.getLogger(__name__)

# Alternate key spellings accepted by config_from_dict.
_KEY_ALIASES = {
    "timeStep": "time_step",
    "dt": "time_step",
    "dragCoefficient": "drag_coefficient",
    "drag_c": "drag_coefficient",
}


@dataclass(frozen=True)
class SimulationConfig:
    """
    Global physics parameters for a World.

    Attributes:
        gravity: Gravitational acceleration magnitude. Applied along +Y
                 (downward in world space). Expected >= 0, not enforced.
        restitution: Coefficient of restitution used for both wall and
                     particle-particle collisions. 1 = perfectly elastic.
        time_step: Fixed simulation timestep in seconds. Must be > 0.
        drag_coefficient: Linear drag coefficient k in F = -k * v.
                          Expected >= 0, not enforced.
    """
    gravity: float = DEFAULT_GRAVITY
    restitution: float = DEFAULT_RESTITUTION
    time_step: float = DEFAULT_TIME_STEP
    drag_coefficient: float = DEFAULT_DRAG

    def __post_init__(self) -> None:
        if not self.time_step > 0:
            raise ValueError(f"time_step must be positive, got {self.time_step}")


def config_from_dict(d: dict[str, Any]) -> SimulationConfig:
    """
    Build a SimulationConfig from a plain dictionary.

    Missing keys take defaults. Unknown keys are ignored for forward
    compatibility.
    """
    values: dict[str, float] = {}
    for key, value in d.items():
        name = _KEY_ALIASES.get(key, key)
        if name in SimulationConfig.__dataclass_fields__:
            values[name] = float(value)
        else:
            logger.debug("Ignoring unknown config key %r", key)
    return SimulationConfig(**values)


def config_to_dict(config: SimulationConfig) -> dict[str, float]:
    """Serialize a SimulationConfig to a JSON-compatible dictionary."""
    return asdict(config)


def load_config(path: str) -> SimulationConfig:
    """
    Load a SimulationConfig from a JSON file.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the file does not hold a JSON object or time_step <= 0.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a JSON object, got {type(data).__name__}")
    config = config_from_dict(data)
    logger.debug("Loaded config from %s: %s", path, config)
    return config
