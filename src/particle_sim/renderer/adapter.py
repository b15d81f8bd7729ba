# MIT License (see LICENSE)
"""
Renderer adapters for visualizing a World.

The physics core has no rendering dependency. These adapters are read-only
consumers of what the World exposes: particle id, position, velocity,
radius, color and the elapsed time.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, TextIO
import sys

from ..types import Particle

if TYPE_CHECKING:
    from ..world import World


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Subclasses plug the World into a graphics backend (matplotlib, a 3D
    scene graph, a web frontend, ...).

    Usage:
        renderer.render_world(world)
    """

    @abstractmethod
    def begin_frame(self, time: float) -> None:
        """Start a frame at simulation time `time`."""
        ...

    @abstractmethod
    def draw_particle(self, particle: Particle) -> None:
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """Finish the frame after all particles were drawn."""
        ...

    def render_world(self, world: "World") -> None:
        """Draw every particle of the world, in insertion order."""
        self.begin_frame(world.time)
        for p in world.particles:
            self.draw_particle(p)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Text renderer writing one line per particle to a stream.

    Output:
        === Frame t=0.0160 ===
        [1] euler r=12.00 @ (50.96, 348.64, 199.68) v=(60.00, -84.84, -20.00) #ff6b6b
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = True):
        """
        Args:
            output: Output stream (defaults to sys.stdout).
            verbose: If True, include velocity and color.
        """
        self.output = output or sys.stdout
        self.verbose = verbose

    def begin_frame(self, time: float) -> None:
        self.output.write(f"=== Frame t={time:.4f} ===\n")

    def draw_particle(self, particle: Particle) -> None:
        x, y, z = particle.position
        method = particle.integrator.value if particle.integrator else "unbound"
        line = f"[{particle.id}] {method} r={particle.radius:.2f} @ ({x:.2f}, {y:.2f}, {z:.2f})"
        if self.verbose:
            vx, vy, vz = particle.velocity
            line += f" v=({vx:.2f}, {vy:.2f}, {vz:.2f}) {particle.color}"
        self.output.write(line + "\n")

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """No-op renderer, for benchmarking without drawing cost."""

    def begin_frame(self, time: float) -> None:
        pass

    def draw_particle(self, particle: Particle) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Records particle state per frame for playback or export.

    Example:
        renderer = BufferedRenderer()
        for _ in range(100):
            world.step()
            renderer.render_world(world)
        ys = [frame["particles"][0]["position"][1] for frame in renderer.frames]
    """

    def __init__(self) -> None:
        self.frames: list[dict[str, Any]] = []
        self._current_frame: dict[str, Any] | None = None

    def begin_frame(self, time: float) -> None:
        self._current_frame = {"time": time, "particles": []}

    def draw_particle(self, particle: Particle) -> None:
        if self._current_frame is None:
            return
        self._current_frame["particles"].append({
            "id": particle.id,
            "position": list(particle.position),
            "velocity": list(particle.velocity),
            "radius": particle.radius,
            "color": particle.color,
            "integrator": particle.integrator.value if particle.integrator else None,
        })

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def clear(self) -> None:
        self.frames.clear()
