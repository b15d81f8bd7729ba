# MIT License (see LICENSE)
"""
Rendering adapters for visualization.

This subpackage provides:
    - RendererAdapter: Abstract base class defining the rendering interface.
    - DebugRenderer: Text output for debugging.
    - NullRenderer: No-op renderer for performance testing.
    - BufferedRenderer: Records frames for playback or export.

Typical usage:
    from particle_sim.renderer import DebugRenderer

    DebugRenderer().render_world(world)
"""
from .adapter import (
    RendererAdapter,
    DebugRenderer,
    NullRenderer,
    BufferedRenderer,
)

__all__ = [
    "RendererAdapter",
    "DebugRenderer",
    "NullRenderer",
    "BufferedRenderer",
]
