"""
Projectile Definitions
======================
A projectile exposes its mass, drag coefficient and the area it presents
to the airflow. Shapes differ only in how that area is computed, so each
shape subclasses Projectile and implements projected_area().
"""

import numpy as np


SPHERE_DRAG_COEFFICIENT = 0.47      # smooth sphere, subsonic


class Projectile:
    """
    Base projectile. Not used directly: subclasses provide the shape.
    """

    def __init__(self, mass: float, drag_coefficient: float):
        self.mass = mass                            # kg
        self.drag_coefficient = drag_coefficient    # dimensionless

    def projected_area(self) -> float:
        """Cross-sectional area facing the flow (m²)."""
        raise NotImplementedError(
            f"{type(self).__name__} does not define a projected area"
        )

    def __repr__(self):
        return (f"{type(self).__name__}(mass={self.mass!r}, "
                f"drag_coefficient={self.drag_coefficient!r})")


class SphericalProjectile(Projectile):
    def __init__(self, mass: float, radius: float):
        super().__init__(mass, SPHERE_DRAG_COEFFICIENT)
        self.radius = radius                        # m

    def projected_area(self) -> float:
        # great-circle cross-section
        return np.pi * self.radius ** 2

    @property
    def diameter(self) -> float:
        return 2.0 * self.radius

    def __repr__(self):
        return f"SphericalProjectile(mass={self.mass!r}, radius={self.radius!r})"
