"""
Apollo Projectile Simulator
===========================
Computes the flight path of a projectile under altitude-dependent gravity
and quadratic aerodynamic drag (with wind and humid air), and searches
for the launch angles that land it on a chosen target.

  - Fixed-step explicit Euler integration until ground impact
  - Ideal-gas air density from pressure, temperature and humidity
  - Derivative-free pitch/yaw interval narrowing search
  - Validation against closed-form and scipy RK45 references
"""

import logging

from .vector import Vector3
from .gravity import G, EARTH, GravitationalBody
from .aerodynamics import Gas, DryAir, WaterVapor, Compound, CompoundGas, drag
from .weather import (
    WeatherCondition, WeatherConditionWind, WeatherConditionTemperatures,
    WeatherConditionAir, wind_direction_from_degrees,
)
from .projectile import Projectile, SphericalProjectile
from .exceptions import ApolloError, InvalidStateError
from .simulator import (
    Simulator, SimulatorOptions, SimulatorState, SimulationResult, simulate,
)
from .optimizer import (
    SimulatorOptimizer, OptimizationResult, OptimizerStep,
    launch_velocity, optimize,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"
__all__ = [
    'Vector3',
    'G', 'EARTH', 'GravitationalBody',
    'Gas', 'DryAir', 'WaterVapor', 'Compound', 'CompoundGas', 'drag',
    'WeatherCondition', 'WeatherConditionWind', 'WeatherConditionTemperatures',
    'WeatherConditionAir', 'wind_direction_from_degrees',
    'Projectile', 'SphericalProjectile',
    'ApolloError', 'InvalidStateError',
    'Simulator', 'SimulatorOptions', 'SimulatorState', 'SimulationResult', 'simulate',
    'SimulatorOptimizer', 'OptimizationResult', 'OptimizerStep',
    'launch_velocity', 'optimize',
]
