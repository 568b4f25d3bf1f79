#!/usr/bin/env python3
"""
═══════════════════════════════════════════════════════════════════════════════
  APOLLO PROJECTILE SIMULATOR — Main Runner
═══════════════════════════════════════════════════════════════════════════════

  Executes the complete simulation pipeline:
    1. Air density for dry and humid conditions
    2. Reference trajectory (Euler, drag)
    3. Vacuum check against closed-form motion
    4. Euler step-size convergence
    5. Wind effects
    6. Validation against scipy RK45 reference
    7. Launch angle search for a target
    8. Figures

  Figures saved to outputs/ directory.

  Usage:
    python main.py              # Run everything
    python main.py --quick      # Skip figures
    python main.py --verbose    # Debug logging from the simulator/optimizer
═══════════════════════════════════════════════════════════════════════════════
"""

import sys
import os
import time
import numpy as np

from apollo import (
    EARTH, SimulatorOptions, SphericalProjectile, Vector3, WeatherCondition,
    launch_velocity, optimize, simulate,
)
from apollo.logging_config import setup_logging
from apollo.validation import (
    closed_form_vacuum, dt_convergence, validate_against_reference, vacuum_range,
)


def section(title):
    print(f"\n{'─'*60}")
    print(f"  {title}")
    print(f"{'─'*60}")


def main():
    start_time = time.time()
    quick = '--quick' in sys.argv
    setup_logging(verbose='--verbose' in sys.argv)

    g = EARTH.surface_gravity()
    ball = SphericalProjectile(mass=0.15, radius=0.09)
    still_air = WeatherCondition.from_scalars(temperature=288.0, pressure=101325.0)
    options = SimulatorOptions(max_iterations=10000, generate_data_points=True)

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 1: Air Density
    # ══════════════════════════════════════════════════════════════════════
    section("PHASE 1: Air Density")
    print(f"  {'T (K)':>8} {'P (Pa)':>10} {'RH':>6} {'ρ (kg/m³)':>11}")
    for temp, pressure, rh in [(288.15, 101325, 0.0), (288.15, 101325, 0.5),
                               (303.15, 102300, 0.0), (303.15, 102300, 1.0),
                               (253.15, 90000, 0.0)]:
        w = WeatherCondition.from_scalars(temperature=temp, pressure=pressure, humidity=rh)
        print(f"  {temp:>8.2f} {pressure:>10.0f} {rh:>6.2f} {w.air_density:>11.5f}")
    print(f"\n  Surface gravity: {g:.4f} m/s²")

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 2: Reference Trajectory
    # ══════════════════════════════════════════════════════════════════════
    section("PHASE 2: Reference Trajectory (0.15 kg sphere, 20 m/s @ 45°)")
    ref = simulate(options, still_air, ball, launch_velocity(20.0, np.radians(45.0), 0.0))
    print(ref.summary())
    print(f"  Vacuum range v²/g: {vacuum_range(20.0, np.radians(45.0), g):.2f} m")

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 3: Vacuum Check
    # ══════════════════════════════════════════════════════════════════════
    section("PHASE 3: Vacuum vs Closed Form")
    vac = simulate(options, WeatherCondition.vacuum(), ball,
                   launch_velocity(20.0, np.radians(45.0), 0.0))
    print(f"  Simulated range : {vac.range_total:.3f} m")
    print(f"  Closed-form     : {vacuum_range(20.0, np.radians(45.0), g):.3f} m")
    t_check = 1.0
    expected = closed_form_vacuum(20.0, np.radians(45.0), 0.0, g, t_check)
    print(f"  Altitude at t={t_check}s: sim {vac.y[int(round(t_check / vac.dt)) - 1]:.4f} m, "
          f"exact {expected.y:.4f} m")

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 4: Step-size Convergence
    # ══════════════════════════════════════════════════════════════════════
    section("PHASE 4: Euler Step-size Convergence")
    conv = dt_convergence()
    for dt, err in conv:
        print(f"  dt={dt:<8.4f}  position error after 2 s: {err:.5f} m")

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 5: Wind Effects
    # ══════════════════════════════════════════════════════════════════════
    section("PHASE 5: Wind Effects")
    wind_cases = [
        ("No Wind", 0.0, 0.0),
        ("Headwind 5 m/s", 5.0, -np.pi / 2),
        ("Tailwind 5 m/s", 5.0, np.pi / 2),
        ("Crosswind 5 m/s", 5.0, 0.0),
    ]
    wind_results = {}
    for label, speed, direction in wind_cases:
        w = WeatherCondition.from_scalars(wind_speed=speed, wind_direction=direction,
                                          temperature=288.0)
        r = simulate(options, w, ball, launch_velocity(20.0, np.radians(45.0), 0.0))
        wind_results[label] = r
        p = r.final_position
        print(f"  {label:<20s}  Range: {r.range_total:>6.2f} m  Drift: {p.x:>+6.2f} m")

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 6: Validation
    # ══════════════════════════════════════════════════════════════════════
    section("PHASE 6: Validation — Euler vs scipy RK45")
    validate_against_reference(dt=0.01)

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 7: Launch Angle Search
    # ══════════════════════════════════════════════════════════════════════
    section("PHASE 7: Launch Angle Search")
    target = Vector3(100.0, 0.0, 0.0)
    search_options = SimulatorOptions(max_iterations=10000)
    cases = [
        ("0.15 kg sphere", ball),
        ("1 kg sphere", SphericalProjectile(mass=1.0, radius=0.05)),
    ]
    search_result = None
    for label, proj in cases:
        res = optimize(target, max_iterations=100, threshold=0.01, initial_speed=50.0,
                       options=search_options, weather=still_air, projectile=proj)
        print(f"  {label:<16s} pitch={res.pitch_deg:>7.3f}°  yaw={res.yaw_deg:>7.3f}°  "
              f"error={res.error:>9.4f} m  iterations={res.iterations}")
        search_result = res

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 8: Figures
    # ══════════════════════════════════════════════════════════════════════
    if not quick:
        import matplotlib.pyplot as plt
        from apollo.optimizer import SimulatorOptimizer
        from apollo.visualization import (
            ensure_output_dir, plot_dt_convergence, plot_optimizer_search,
            plot_trajectory, plot_wind_effects,
        )

        section("PHASE 8: Figures")
        out = ensure_output_dir('outputs')

        plt.close(plot_trajectory(ref, title='Reference Trajectory',
                                  save_path=f'{out}/01_reference_trajectory.png'))
        plt.close(plot_dt_convergence(conv, save_path=f'{out}/02_dt_convergence.png'))
        plt.close(plot_wind_effects(wind_results, save_path=f'{out}/03_wind_effects.png'))

        heavy = cases[-1][1]
        optimizer = SimulatorOptimizer(100, 0.01, 50.0, search_options, still_air, heavy)
        optimizer.run(target)
        plt.close(plot_optimizer_search(optimizer.history, threshold=0.01,
                                        save_path=f'{out}/04_optimizer_search.png'))

        best = simulate(options, still_air, heavy,
                        launch_velocity(50.0, search_result.pitch, search_result.yaw))
        plt.close(plot_trajectory(best, title='Optimized Launch', target=target,
                                  save_path=f'{out}/05_optimized_trajectory.png'))
        print(f"  ✓ Saved figures to: {os.path.abspath(out)}/")
    else:
        section("PHASE 8: Figures SKIPPED (--quick mode)")

    elapsed = time.time() - start_time
    section("COMPLETE")
    print(f"\n  Total runtime: {elapsed:.1f} seconds\n")


if __name__ == "__main__":
    main()
