# MIT License (see LICENSE)
"""
Immutable 3D vector type used for all kinematic state.

Every operation returns a new Vector3, so a value can be shared freely
between particles, probe states and callers without aliasing. This is what
lets RK4 evaluate hypothetical states without touching the real particle.

Degenerate inputs never raise:
  - div(0)         -> zero vector
  - normalize() of a zero-length vector -> zero vector

Axes are addressed by index (0 = x, 1 = y, 2 = z). World Y grows downward.
"""
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Any, Iterator

import numpy as np

from .util import f64


@dataclass(frozen=True)
class Vector3:
    """
    Three-component float vector.

    Attributes:
        x: X component.
        y: Y component (positive is downward in world space).
        z: Z component.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def zero(cls) -> Vector3:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_array(cls, arr) -> Vector3:
        """Build from any length-3 array-like (list, tuple, numpy array)."""
        a = f64(arr)
        if a.shape != (3,):
            raise ValueError(f"Expected 3 components, got shape {a.shape}")
        return cls(float(a[0]), float(a[1]), float(a[2]))

    def to_array(self) -> np.ndarray:
        """Return the components as a float64 numpy array of shape (3,)."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, v: Vector3) -> Vector3:
        return Vector3(self.x + v.x, self.y + v.y, self.z + v.z)

    def sub(self, v: Vector3) -> Vector3:
        return Vector3(self.x - v.x, self.y - v.y, self.z - v.z)

    def mult(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def div(self, scalar: float) -> Vector3:
        """Divide by a scalar. Division by exactly zero yields the zero vector."""
        if scalar == 0:
            return Vector3.zero()
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def magnitude_squared(self) -> float:
        """Squared length. Avoids sqrt."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalize(self) -> Vector3:
        """Unit vector in the same direction, or the zero vector if |v| == 0."""
        m = self.magnitude()
        if m == 0:
            return Vector3.zero()
        return self.div(m)

    def dot(self, v: Vector3) -> float:
        return self.x * v.x + self.y * v.y + self.z * v.z

    def distance(self, v: Vector3) -> float:
        """Euclidean distance between two points."""
        return self.sub(v).magnitude()

    # -------------------------------------------------------------------------
    # Per-axis access (used by wall collision)
    # -------------------------------------------------------------------------

    def component(self, axis: int) -> float:
        return (self.x, self.y, self.z)[axis]

    def with_component(self, axis: int, value: float) -> Vector3:
        """Return a copy with one axis replaced."""
        if axis == 0:
            return Vector3(value, self.y, self.z)
        if axis == 1:
            return Vector3(self.x, value, self.z)
        if axis == 2:
            return Vector3(self.x, self.y, value)
        raise IndexError(f"Axis must be 0, 1 or 2, got {axis}")

    # -------------------------------------------------------------------------
    # Operator overloads (same semantics as the named methods)
    # -------------------------------------------------------------------------

    def __add__(self, other: Vector3) -> Vector3:
        return self.add(other)

    def __sub__(self, other: Vector3) -> Vector3:
        return self.sub(other)

    def __mul__(self, scalar: float) -> Vector3:
        return self.mult(scalar)

    def __rmul__(self, scalar: float) -> Vector3:
        return self.mult(scalar)

    def __truediv__(self, scalar: float) -> Vector3:
        return self.div(scalar)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z


def as_vector3(value: Any) -> Vector3:
    """
    Coerce a Vector3, a length-3 sequence or a numpy array into a Vector3.

    Raises:
        ValueError: If the input does not have exactly three components.
    """
    if isinstance(value, Vector3):
        return value
    return Vector3.from_array(value)
