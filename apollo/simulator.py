"""
Trajectory Integrator
=====================
Advances a projectile from its launch state until it reaches the ground
(y ≤ 0) or the iteration cap is hit, using explicit Euler steps:

    a_n     = F(x_n, v_n) / m
    v_{n+1} = v_n + a_n · dt
    x_{n+1} = x_n + v_{n+1} · dt

Forces: altitude-dependent gravity (vertical only) plus quadratic drag
relative to the wind. The ground check runs after the position update,
so the final point may sit slightly below y = 0.

A Simulator is single-use per run: results can only be read once run()
has completed, otherwise InvalidStateError is raised. If a step raises,
the exception propagates and the simulator drops back to UNINITIALIZED.
"""

import enum
import logging
import time
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .aerodynamics import drag
from .exceptions import InvalidStateError
from .gravity import EARTH, GravitationalBody
from .projectile import Projectile
from .vector import Vector3
from .weather import WeatherCondition

logger = logging.getLogger(__name__)


DEFAULT_DT = 0.01                   # s
DEFAULT_MAX_ITERATIONS = 10000


@dataclass(frozen=True)
class SimulatorOptions:
    max_iterations: int = DEFAULT_MAX_ITERATIONS
    generate_data_points: bool = False     # record every position

    def __post_init__(self):
        if self.max_iterations < 1:
            raise ValueError(
                f"max_iterations must be at least 1, got {self.max_iterations}"
            )


class SimulatorState(enum.Enum):
    UNINITIALIZED = "uninitialized"
    RUNNING = "running"
    COMPLETED = "completed"


@dataclass
class SimulationResult:
    """Outcome of one completed run."""
    final_position: Vector3
    final_velocity: Vector3
    duration_ms: float          # wall clock, not part of the physics
    iterations: int
    dt: float
    max_altitude: float
    path: Optional[np.ndarray] = None   # shape (N, 3) when recorded

    @property
    def range_total(self) -> float:
        """Horizontal distance of the impact point from the origin (m)."""
        return float(np.hypot(self.final_position.x, self.final_position.z))

    @property
    def flight_time(self) -> float:
        """Simulated time (s)."""
        return self.iterations * self.dt

    @property
    def x(self) -> np.ndarray:
        return self._require_path()[:, 0]

    @property
    def y(self) -> np.ndarray:
        return self._require_path()[:, 1]

    @property
    def z(self) -> np.ndarray:
        return self._require_path()[:, 2]

    def _require_path(self) -> np.ndarray:
        if self.path is None:
            raise InvalidStateError("No data points available; enable generate_data_points.")
        return self.path

    def summary(self) -> str:
        """Human-readable summary string."""
        p = self.final_position
        lines = [
            f"╔══════════════════════════════════════════════════════╗",
            f"║  SIMULATION SUMMARY{'':<35s}║",
            f"╠══════════════════════════════════════════════════════╣",
            f"║  Timestep     : {self.dt:<37.4f}║",
            f"║  Iterations   : {self.iterations:<37d}║",
            f"║  Flight time  : {self.flight_time:>10.2f} s{'':<25s}║",
            f"║  Range        : {self.range_total:>10.2f} m{'':<25s}║",
            f"║  Max altitude : {self.max_altitude:>10.2f} m{'':<25s}║",
            f"║  Impact point : ({p.x:>8.2f}, {p.y:>6.2f}, {p.z:>8.2f}){'':<8s}║",
            f"║  Wall clock   : {self.duration_ms:>10.2f} ms{'':<24s}║",
            f"╚══════════════════════════════════════════════════════╝",
        ]
        return '\n'.join(lines)


def compute_acceleration(position: Vector3, velocity: Vector3,
                         projectile: Projectile, weather: WeatherCondition,
                         air_density: Optional[float] = None,
                         body: GravitationalBody = EARTH) -> Vector3:
    """
    Net acceleration (m/s²) on the projectile at the given state.

    air_density may be passed in precomputed; it only depends on the
    weather, which is fixed for a run.
    """
    if air_density is None:
        air_density = weather.air_compound.density

    f_gravity = Vector3(0.0, body.force_on_object(position.y, projectile.mass), 0.0)
    f_drag = drag(
        velocity,
        weather.wind_velocity,
        air_density,
        projectile.projected_area(),
        projectile.drag_coefficient,
    )
    return f_gravity.add(f_drag).scale(1.0 / np.float64(projectile.mass))


class Simulator:
    """Integrates a single trajectory. Build a new one for every launch."""

    def __init__(self, options: SimulatorOptions, weather: WeatherCondition,
                 projectile: Projectile, initial_velocity: Vector3,
                 initial_position: Vector3 = Vector3.zero()):
        self.options = options
        self.weather = weather
        self.projectile = projectile
        self.initial_velocity = initial_velocity
        self.initial_position = initial_position

        self._state = SimulatorState.UNINITIALIZED
        self._result: Optional[SimulationResult] = None

    @property
    def state(self) -> SimulatorState:
        return self._state

    def _completed(self) -> SimulationResult:
        if self._state is not SimulatorState.COMPLETED:
            raise InvalidStateError(
                f"Simulator is {self._state.value}; run the simulation first."
            )
        return self._result

    @property
    def result(self) -> SimulationResult:
        return self._completed()

    @property
    def projectile_position(self) -> Vector3:
        return self._completed().final_position

    @property
    def projectile_velocity(self) -> Vector3:
        return self._completed().final_velocity

    @property
    def iterations(self) -> int:
        return self._completed().iterations

    @property
    def duration(self) -> float:
        """Wall-clock run time in milliseconds."""
        return self._completed().duration_ms

    @property
    def data_points(self) -> np.ndarray:
        result = self._completed()
        if result.path is None:
            raise InvalidStateError("No data points available.")
        return result.path

    def run(self, dt: float = DEFAULT_DT) -> SimulationResult:
        """Integrate until ground impact or max_iterations steps."""
        if dt <= 0:
            raise ValueError(f"dt must be positive, got {dt}")

        self._state = SimulatorState.RUNNING
        self._result = None

        iterations = 0
        start = time.perf_counter()

        position = self.initial_position.clone()
        velocity = self.initial_velocity.clone()
        max_altitude = position.y
        record = self.options.generate_data_points
        data_points = [] if record else None

        try:
            air_density = self.weather.air_compound.density

            while iterations < self.options.max_iterations:
                acceleration = compute_acceleration(
                    position, velocity, self.projectile, self.weather, air_density
                )
                velocity = velocity.add(acceleration.scale(dt))
                position = position.add(velocity.scale(dt))
                iterations += 1

                if record:
                    data_points.append((position.x, position.y, position.z))
                max_altitude = max(max_altitude, position.y)

                # Stop when the projectile hits the ground
                if position.y <= 0:
                    break
        except Exception:
            # A failed run leaves nothing to read; the simulator can be rerun
            self._state = SimulatorState.UNINITIALIZED
            raise

        end = time.perf_counter()

        path = np.array(data_points, dtype=float).reshape(-1, 3) if record else None
        self._result = SimulationResult(
            final_position=position,
            final_velocity=velocity,
            duration_ms=(end - start) * 1000.0,
            iterations=iterations,
            dt=dt,
            max_altitude=max_altitude,
            path=path,
        )
        self._state = SimulatorState.COMPLETED

        logger.debug(
            "Simulation finished after %d steps (dt=%g): position=(%.3f, %.3f, %.3f)",
            iterations, dt, position.x, position.y, position.z,
        )
        return self._result


def simulate(options: SimulatorOptions, weather: WeatherCondition,
             projectile: Projectile, initial_velocity: Vector3,
             initial_position: Vector3 = Vector3.zero(),
             dt: float = DEFAULT_DT) -> SimulationResult:
    """Run one trajectory and return its result."""
    simulator = Simulator(options, weather, projectile,
                          initial_velocity, initial_position)
    return simulator.run(dt)
