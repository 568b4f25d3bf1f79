"""
Validation Against Reference Solutions
======================================
Checks the explicit Euler integrator against two references:

  - Closed-form projectile motion in vacuum under constant gravity
    (g taken at the reference surface of the gravitational body).
  - A high-accuracy integration of the *same* force model with
    scipy's adaptive RK45 solver, stopped exactly at ground impact.

Euler is first order, so agreement is expected within an error
proportional to dt, not to machine precision.
"""

import numpy as np
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from scipy.integrate import solve_ivp

from .gravity import EARTH
from .optimizer import launch_velocity
from .projectile import Projectile, SphericalProjectile
from .simulator import Simulator, SimulatorOptions, compute_acceleration
from .vector import Vector3
from .weather import WeatherCondition


def closed_form_vacuum(speed: float, pitch: float, yaw: float, g: float,
                       t: float) -> Vector3:
    """Analytic position at time t for a launch from the origin, no drag."""
    v0 = launch_velocity(speed, pitch, yaw)
    return Vector3(
        v0.x * t,
        v0.y * t - 0.5 * g * t ** 2,
        v0.z * t,
    )


def vacuum_range(speed: float, pitch: float, g: float) -> float:
    """Horizontal range back to launch height, no drag (m)."""
    return speed ** 2 * np.sin(2.0 * pitch) / g


def reference_trajectory(weather: WeatherCondition, projectile: Projectile,
                         initial_velocity: Vector3,
                         initial_position: Vector3 = Vector3.zero(),
                         max_time: float = 300.0,
                         rtol: float = 1e-10, atol: float = 1e-10):
    """
    Integrate the trajectory to ground impact with scipy's RK45.

    Returns
    -------
    scipy OdeResult; the impact state is ``sol.y_events[0][0]`` when the
    ground was reached before max_time.
    """
    air_density = weather.air_compound.density

    def rhs(t, state):
        pos = Vector3.from_array(state[:3])
        vel = Vector3.from_array(state[3:])
        acc = compute_acceleration(pos, vel, projectile, weather, air_density)
        return [vel.x, vel.y, vel.z, acc.x, acc.y, acc.z]

    def hit_ground(t, state):
        return state[1]
    hit_ground.terminal = True
    hit_ground.direction = -1

    y0 = np.concatenate([initial_position.to_array(), initial_velocity.to_array()])
    return solve_ivp(rhs, (0.0, max_time), y0, method='RK45',
                     events=hit_ground, rtol=rtol, atol=atol)


@dataclass
class ValidationCase:
    name: str
    projectile: Projectile
    speed: float                    # m/s
    pitch_deg: float
    yaw_deg: float = 0.0
    weather: WeatherCondition = field(default_factory=WeatherCondition.standard)


@dataclass
class ValidationResult:
    """Result of one validation comparison."""
    name: str
    ref_range: float        # reference range (m)
    sim_range: float        # simulated range (m)
    range_error: float      # m
    ref_tof: float
    sim_tof: float
    tof_error: float        # s


DEFAULT_CASES = [
    ValidationCase("Baseball-size sphere, 45°", SphericalProjectile(0.15, 0.09), 20.0, 45.0),
    ValidationCase("Baseball-size sphere, 30°", SphericalProjectile(0.15, 0.09), 20.0, 30.0),
    ValidationCase("Shot put, 40°", SphericalProjectile(7.26, 0.06), 14.0, 40.0),
    ValidationCase("Shot put, headwind", SphericalProjectile(7.26, 0.06), 14.0, 40.0,
                   weather=WeatherCondition.from_scalars(wind_speed=10.0,
                                                         wind_direction=-np.pi / 2)),
]


def validate_against_reference(cases: Sequence[ValidationCase] = DEFAULT_CASES,
                               dt: float = 0.01,
                               verbose: bool = True) -> List[ValidationResult]:
    """
    Run the Euler simulator for each case and compare range and time of
    flight against the scipy reference.
    """
    options = SimulatorOptions(max_iterations=200000)
    results = []

    if verbose:
        print(f"\n{'='*75}")
        print(f"  VALIDATION: Euler (dt={dt}) vs RK45 reference")
        print(f"{'='*75}")
        print(f"{'Case':<28} {'Ref R (m)':>10} {'Sim R (m)':>10} {'ΔR (m)':>8} "
              f"{'Ref ToF':>8} {'Sim ToF':>8} {'ΔT (s)':>7}")
        print("-" * 75)

    for case in cases:
        v0 = launch_velocity(case.speed, np.radians(case.pitch_deg), np.radians(case.yaw_deg))

        ref = reference_trajectory(case.weather, case.projectile, v0)
        impact = ref.y_events[0][0]
        ref_range = float(np.hypot(impact[0], impact[2]))
        ref_tof = float(ref.t_events[0][0])

        sim = Simulator(options, case.weather, case.projectile, v0).run(dt)

        vr = ValidationResult(
            name=case.name,
            ref_range=ref_range,
            sim_range=sim.range_total,
            range_error=sim.range_total - ref_range,
            ref_tof=ref_tof,
            sim_tof=sim.flight_time,
            tof_error=sim.flight_time - ref_tof,
        )
        results.append(vr)

        if verbose:
            print(f"{case.name:<28} {ref_range:>10.2f} {sim.range_total:>10.2f} "
                  f"{vr.range_error:>+8.3f} {ref_tof:>8.3f} {sim.flight_time:>8.3f} "
                  f"{vr.tof_error:>+7.3f}")

    if verbose:
        mean_err = np.mean([abs(r.range_error) for r in results])
        print("-" * 75)
        print(f"  Mean absolute range error: {mean_err:.3f} m")
        print(f"{'='*75}\n")

    return results


def dt_convergence(dts: Sequence[float] = (0.04, 0.02, 0.01, 0.005),
                   speed: float = 30.0, pitch_deg: float = 60.0,
                   t_end: float = 2.0) -> List[Tuple[float, float]]:
    """
    Euler position error against the closed form after t_end seconds of
    drag-free flight, for each step size. Returns (dt, error) pairs.

    t_end must be a whole number of steps for every dt, and short enough
    that the projectile is still airborne.
    """
    weather = WeatherCondition.vacuum()
    projectile = SphericalProjectile(1.0, 0.05)
    pitch = np.radians(pitch_deg)
    g = EARTH.surface_gravity()
    expected = closed_form_vacuum(speed, pitch, 0.0, g, t_end)

    errors = []
    for dt in dts:
        steps = int(round(t_end / dt))
        options = SimulatorOptions(max_iterations=steps)
        sim = Simulator(options, weather, projectile,
                        launch_velocity(speed, pitch, 0.0)).run(dt)
        errors.append((dt, sim.final_position.distance_to(expected)))
    return errors
