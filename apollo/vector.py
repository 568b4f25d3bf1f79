"""
Vector3 Value Type
==================
Minimal 3D vector used for every physical quantity in the simulator
(positions, velocities, forces).

Coordinate system:
  x = lateral (horizontal)
  y = altitude  (vertical, up positive)
  z = forward (horizontal, yaw 0 points along +z)

Instances are immutable; every operation returns a new vector, so no
cloning is needed before stepping state forward.
"""

import numpy as np
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def zero(cls) -> "Vector3":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_array(cls, arr) -> "Vector3":
        """Build from any length-3 sequence (numpy array, list, tuple)."""
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z])

    def clone(self) -> "Vector3":
        return Vector3(self.x, self.y, self.z)

    # ── Arithmetic ────────────────────────────────────────────────────────
    def add(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def subtract(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, factor: float) -> "Vector3":
        return Vector3(self.x * factor, self.y * factor, self.z * factor)

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        return float(np.sqrt(self.dot(self)))

    def normalize(self) -> "Vector3":
        """
        Unit vector in the same direction.

        A zero vector has no direction: numpy division yields NaN
        components (with a RuntimeWarning) rather than raising.
        """
        components = self.to_array() / np.float64(self.length())
        return Vector3.from_array(components)

    def distance_to(self, other: "Vector3") -> float:
        return self.subtract(other).length()

    # ── Operator forms ────────────────────────────────────────────────────
    def __add__(self, other: "Vector3") -> "Vector3":
        return self.add(other)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return self.subtract(other)

    def __mul__(self, factor: float) -> "Vector3":
        return self.scale(factor)

    __rmul__ = __mul__

    def __neg__(self) -> "Vector3":
        return self.scale(-1.0)

    def __iter__(self):
        return iter((self.x, self.y, self.z))
