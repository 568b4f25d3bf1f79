"""
Gravity Model
=============
Newtonian inverse-square gravity of a reference body acting on the
projectile, evaluated at the projectile's current altitude.

    F = -G · M · m / (R + h)²

Negative values point toward the body centre (down the y axis). No
special-casing below the reference radius: negative altitudes are fed
straight into the inverse-square law.
"""

import numpy as np
from dataclasses import dataclass


# ── Physical constants ────────────────────────────────────────────────────
G = 6.67430e-11                 # m³/(kg·s²)  gravitational constant


@dataclass(frozen=True)
class GravitationalBody:
    """A spherical body that attracts the projectile."""
    mass: float                 # kg
    radius: float               # m  reference (surface) radius

    def force_on_object(self, altitude: float, mass: float) -> float:
        """
        Signed vertical gravitational force (N) on an object of `mass` kg
        at `altitude` m above the reference radius.
        """
        numerator = -G * self.mass * np.float64(mass)
        denominator = (self.radius + altitude) ** 2
        return numerator / denominator

    def surface_gravity(self) -> float:
        """Magnitude of gravitational acceleration at altitude 0 (m/s²)."""
        return float(-self.force_on_object(0.0, 1.0))


EARTH = GravitationalBody(
    mass=5.972e24,
    radius=6_371_000.0,
)
