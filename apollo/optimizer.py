"""
Launch Angle Search
===================
Finds the pitch and yaw that make a projectile launched at a fixed speed
from the origin land closest to a target.

Each iteration splits the pitch and yaw intervals at their midpoints and
probes the centre of each half, giving a 2 × 2 grid of (pitch, yaw)
pairs. Every pair is flown with a fresh Simulator and scored by the
Euclidean distance between landing point and target. Each interval then
keeps the half that holds the best probe. Pitch and yaw are narrowed
independently even though they were scored jointly, so this is a
heuristic, not a guaranteed 2D minimizer.

The search stops when the best error drops below the threshold, when it
improves by less than STALL_EPSILON over the previous iteration, or when
max_iterations is reached. Non-convergence is not an error: check the
returned error and iteration count.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from .exceptions import InvalidStateError
from .projectile import Projectile
from .simulator import DEFAULT_DT, Simulator, SimulatorOptions
from .vector import Vector3
from .weather import WeatherCondition

logger = logging.getLogger(__name__)


STALL_EPSILON = 1e-5                        # m
DEFAULT_PITCH_INTERVAL = (0.0, np.pi)       # rad
DEFAULT_YAW_INTERVAL = (-np.pi / 2, np.pi / 2)


def launch_velocity(speed: float, pitch: float, yaw: float) -> Vector3:
    """
    Convert launch speed + angles (rad) to a velocity vector.
    Pitch is elevation above horizontal; yaw 0 points along +z.
    """
    return Vector3(
        speed * np.cos(pitch) * np.sin(yaw),
        speed * np.sin(pitch),
        speed * np.cos(pitch) * np.cos(yaw),
    )


def _midpoint(start: float, end: float) -> float:
    return (end - start) / 2.0 + start


@dataclass(frozen=True)
class OptimizerStep:
    """Best probe of one search iteration."""
    iteration: int
    pitch: float
    yaw: float
    error: float


@dataclass(frozen=True)
class OptimizationResult:
    pitch: float                # rad
    yaw: float                  # rad
    error: float                # m
    iterations: int

    @property
    def pitch_deg(self) -> float:
        return float(np.degrees(self.pitch))

    @property
    def yaw_deg(self) -> float:
        return float(np.degrees(self.yaw))


class SimulatorOptimizer:

    def __init__(self, max_iterations: int, threshold: float, initial_speed: float,
                 simulator_options: SimulatorOptions,
                 simulator_weather: WeatherCondition,
                 simulator_projectile: Projectile,
                 dt: float = DEFAULT_DT):
        if max_iterations < 1:
            raise ValueError(f"max_iterations must be at least 1, got {max_iterations}")

        self.max_iterations = max_iterations
        self.threshold = threshold
        self.initial_speed = initial_speed
        self.simulator_options = simulator_options
        self.simulator_weather = simulator_weather
        self.simulator_projectile = simulator_projectile
        self.dt = dt

        self._completed = False
        self._pitch: Optional[float] = None
        self._yaw: Optional[float] = None
        self._iteration: Optional[int] = None
        self._error: Optional[float] = None
        self._history: List[OptimizerStep] = []
        self._simulator: Optional[Simulator] = None

    def _require_completed(self, what: str):
        if not self._completed:
            raise InvalidStateError(f"No {what} available; run the optimizer first.")

    @property
    def pitch(self) -> float:
        self._require_completed("pitch")
        return self._pitch

    @property
    def yaw(self) -> float:
        self._require_completed("yaw")
        return self._yaw

    @property
    def iterations(self) -> int:
        self._require_completed("iterations")
        return self._iteration

    @property
    def error(self) -> float:
        self._require_completed("error")
        return self._error

    @property
    def history(self) -> List[OptimizerStep]:
        self._require_completed("history")
        return list(self._history)

    def result(self) -> OptimizationResult:
        self._require_completed("result")
        return OptimizationResult(self._pitch, self._yaw, self._error, self._iteration)

    def _calculate_error(self, target: Vector3, pitch: float, yaw: float) -> float:
        """Fly one probe and return the landing distance to the target."""
        self._simulator = Simulator(
            self.simulator_options,
            self.simulator_weather,
            self.simulator_projectile,
            launch_velocity(self.initial_speed, pitch, yaw),
            Vector3.zero(),
        )
        self._simulator.run(self.dt)
        return self._simulator.projectile_position.distance_to(target)

    def run(self, target: Vector3,
            pitch_interval: Tuple[float, float] = DEFAULT_PITCH_INTERVAL,
            yaw_interval: Tuple[float, float] = DEFAULT_YAW_INTERVAL) -> float:
        """Search for the launch angles; returns the final landing error (m)."""
        self._completed = False
        self._history = []

        pitch_begin, pitch_end = pitch_interval
        yaw_begin, yaw_end = yaw_interval

        logger.info(
            "Optimizing launch angles for target (%.2f, %.2f, %.2f) at %.1f m/s",
            target.x, target.y, target.z, self.initial_speed,
        )

        iteration = 0
        previous_error = np.inf
        best_error = best_pitch = best_yaw = None

        while iteration < self.max_iterations:
            iteration += 1

            pitch_sep = _midpoint(pitch_begin, pitch_end)
            pitch_probes = (_midpoint(pitch_begin, pitch_sep), _midpoint(pitch_sep, pitch_end))

            yaw_sep = _midpoint(yaw_begin, yaw_end)
            yaw_probes = (_midpoint(yaw_begin, yaw_sep), _midpoint(yaw_sep, yaw_end))

            best_error = None
            for pitch in pitch_probes:
                for yaw in yaw_probes:
                    error = self._calculate_error(target, pitch, yaw)
                    if best_error is None or error < best_error:
                        best_error, best_pitch, best_yaw = error, pitch, yaw

            if best_pitch > pitch_sep:
                pitch_begin = pitch_sep
            else:
                pitch_end = pitch_sep

            if best_yaw > yaw_sep:
                yaw_begin = yaw_sep
            else:
                yaw_end = yaw_sep

            self._history.append(OptimizerStep(iteration, best_pitch, best_yaw, best_error))
            logger.debug(
                "Iteration %d: pitch=%.6f yaw=%.6f error=%.6f",
                iteration, best_pitch, best_yaw, best_error,
            )

            if best_error < self.threshold:
                break
            if abs(best_error - previous_error) < STALL_EPSILON:
                logger.debug("Search stalled at iteration %d", iteration)
                break

            previous_error = best_error

        self._pitch = best_pitch
        self._yaw = best_yaw
        self._error = best_error
        self._iteration = iteration
        self._completed = True

        logger.info(
            "Optimizer finished after %d iterations: pitch=%.2f° yaw=%.2f° error=%.4f m",
            iteration, np.degrees(best_pitch), np.degrees(best_yaw), best_error,
        )
        return best_error


def optimize(target: Vector3, max_iterations: int, threshold: float,
             initial_speed: float, options: SimulatorOptions,
             weather: WeatherCondition, projectile: Projectile,
             pitch_interval: Tuple[float, float] = DEFAULT_PITCH_INTERVAL,
             yaw_interval: Tuple[float, float] = DEFAULT_YAW_INTERVAL,
             dt: float = DEFAULT_DT) -> OptimizationResult:
    """Search launch angles for `target` and return the best found."""
    optimizer = SimulatorOptimizer(max_iterations, threshold, initial_speed,
                                   options, weather, projectile, dt=dt)
    optimizer.run(target, pitch_interval, yaw_interval)
    return optimizer.result()
