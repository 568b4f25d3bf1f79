"""
Aerodynamic Model
=================
Ideal-gas density for the components of air, mixture ("compound")
density, and the quadratic drag force on a body moving through a
possibly moving gas.

    ρ_gas      = P / (R_specific × T)
    ρ_compound = Σ ρ_i · f_i
    F_drag     = ½ ρ |v_rel|² Cd A v̂_rel,   v_rel = v_gas − v_object

Mixing fractions f_i are used as given; nothing forces them to sum to 1.
"""

import numpy as np
from dataclasses import dataclass
from typing import List

from .vector import Vector3


# ── Gas constants ──────────────────────────────────────────────────────────
R_DRY_AIR            = 287.058     # J/(kg·K)
R_WATER_VAPOR        = 461.5       # J/(kg·K)
SEA_LEVEL_TEMP       = 288.15      # K  (15 °C)
SEA_LEVEL_PRESSURE   = 101325.0    # Pa


@dataclass(frozen=True)
class Gas:
    r: float                    # J/(kg·K)  specific gas constant
    pressure: float             # Pa
    temperature: float          # K

    @property
    def density(self) -> float:
        """Density (kg/m³) from the ideal gas law."""
        return np.float64(self.pressure) / (self.r * self.temperature)


class DryAir(Gas):
    def __init__(self, pressure: float, temperature: float):
        super().__init__(R_DRY_AIR, pressure, temperature)


class WaterVapor(Gas):
    def __init__(self, pressure: float, temperature: float):
        super().__init__(R_WATER_VAPOR, pressure, temperature)


@dataclass(frozen=True)
class CompoundGas:
    gas: Gas
    fraction: float


@dataclass(frozen=True)
class Compound:
    """Weighted mixture of gasses, e.g. dry air plus water vapor."""
    gasses: List[CompoundGas]

    @property
    def density(self) -> float:
        total = 0.0
        for component in self.gasses:
            total += component.gas.density * component.fraction
        return total


def drag(object_velocity: Vector3, gas_velocity: Vector3, gas_density: float,
         cross_section_area: float, drag_coefficient: float) -> Vector3:
    """
    Compute aerodynamic drag force vector (N).

    Parameters
    ----------
    object_velocity : Vector3
        Ground-frame velocity of the object (m/s)
    gas_velocity : Vector3
        Ground-frame velocity of the surrounding gas, i.e. the wind (m/s)
    gas_density : float
        Density of the gas (kg/m³)
    cross_section_area : float
        Projected area facing the flow (m²)
    drag_coefficient : float
        Dimensionless shape factor

    Returns
    -------
    Vector3
        Drag force, pointing along the gas velocity relative to the object.
        When the relative velocity is exactly zero there is no flow
        direction, and the zero vector is returned.
    """
    relative_velocity = gas_velocity.subtract(object_velocity)
    speed = relative_velocity.length()
    if speed == 0.0:
        return Vector3.zero()

    magnitude = 0.5 * gas_density * speed ** 2 * drag_coefficient * cross_section_area
    return relative_velocity.normalize().scale(magnitude)
