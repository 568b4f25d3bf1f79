"""
Weather Conditions
==================
Groups the ambient inputs of a run (wind, temperature, air pressure and
humidity) and turns them into what the integrator needs: a wind velocity
vector and an air compound whose density feeds the drag force.
"""

import numpy as np
from dataclasses import dataclass

from .aerodynamics import (
    Compound, CompoundGas, DryAir, WaterVapor,
    SEA_LEVEL_PRESSURE, SEA_LEVEL_TEMP,
)
from .vector import Vector3


def wind_direction_from_degrees(degrees: float) -> float:
    """Wind direction in radians from a compass-style angle in degrees."""
    return float(np.radians(degrees))


@dataclass(frozen=True)
class WeatherConditionWind:
    speed: float = 0.0          # m/s
    direction: float = 0.0      # rad, 0 = blowing along +x

    @property
    def velocity_vector(self) -> Vector3:
        """Velocity of the air mass, horizontal plane only."""
        return Vector3(
            np.cos(self.direction) * self.speed,
            0.0,
            np.sin(self.direction) * self.speed,
        )


@dataclass(frozen=True)
class WeatherConditionTemperatures:
    average: float = SEA_LEVEL_TEMP     # K


@dataclass(frozen=True)
class WeatherConditionAir:
    pressure: float = SEA_LEVEL_PRESSURE    # Pa
    humidity: float = 0.0                   # relative, 0–1


@dataclass(frozen=True)
class WeatherCondition:
    wind: WeatherConditionWind
    temp: WeatherConditionTemperatures
    air: WeatherConditionAir

    @classmethod
    def from_scalars(cls, wind_speed: float = 0.0, wind_direction: float = 0.0,
                     temperature: float = SEA_LEVEL_TEMP,
                     pressure: float = SEA_LEVEL_PRESSURE,
                     humidity: float = 0.0) -> "WeatherCondition":
        return cls(
            wind=WeatherConditionWind(wind_speed, wind_direction),
            temp=WeatherConditionTemperatures(temperature),
            air=WeatherConditionAir(pressure, humidity),
        )

    @classmethod
    def standard(cls) -> "WeatherCondition":
        """Still, dry air at sea-level pressure and 15 °C."""
        return cls.from_scalars()

    @classmethod
    def vacuum(cls) -> "WeatherCondition":
        """Zero pressure, so zero air density and no drag."""
        return cls.from_scalars(pressure=0.0)

    @property
    def wind_velocity(self) -> Vector3:
        return self.wind.velocity_vector

    @property
    def air_compound(self) -> Compound:
        """
        Dry air and water vapor at the ambient pressure and temperature,
        weighted by (1 − humidity) and humidity respectively.
        """
        dry_fraction = 1.0 - self.air.humidity
        vapor_fraction = self.air.humidity
        return Compound([
            CompoundGas(DryAir(self.air.pressure, self.temp.average), dry_fraction),
            CompoundGas(WaterVapor(self.air.pressure, self.temp.average), vapor_fraction),
        ])

    @property
    def air_density(self) -> float:
        return self.air_compound.density
