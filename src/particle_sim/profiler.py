# MIT License (see LICENSE)
"""
Lightweight timing instrumentation for the simulation step.

A World given a Profiler times its two phases ("collisions" and
"integrate") on every step. No external dependencies.

Example:
    profiler = Profiler()
    world = World(600, 400, 400, profiler=profiler)
    for _ in range(100):
        world.step()
    print(profiler.stats.summary()["integrate"]["mean_ms"])
"""
from __future__ import annotations
import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator

logger = logging.getLogger(__name__)


@dataclass
class ProfileStats:
    """Raw timing samples (seconds) per named section."""
    samples: dict[str, list[float]] = field(default_factory=dict)

    def add(self, name: str, elapsed: float) -> None:
        self.samples.setdefault(name, []).append(elapsed)

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Per-section statistics.

        Returns:
            Dict mapping section name to:
            - 'n': sample count
            - 'mean_ms': average time in milliseconds
            - 'max_ms': maximum time in milliseconds
            - 'total_ms': summed time in milliseconds
        """
        out = {}
        for name, times in self.samples.items():
            total = sum(times)
            out[name] = {
                "n": len(times),
                "mean_ms": 1e3 * total / len(times),
                "max_ms": 1e3 * max(times),
                "total_ms": 1e3 * total,
            }
        return out


class Profiler:
    """Context-manager based section timer."""

    def __init__(self) -> None:
        self.stats = ProfileStats()

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Time the enclosed block and record it under name."""
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.stats.add(name, time.perf_counter() - t0)

    def reset(self) -> None:
        """Drop all recorded samples."""
        logger.debug("Profiler reset (%d sections dropped)", len(self.stats.samples))
        self.stats = ProfileStats()
