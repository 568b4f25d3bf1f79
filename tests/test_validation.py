"""
Tests for the reference solutions used to validate the integrator.
Run: python -m pytest tests/ -v
"""

import sys
import os
import numpy as np
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from apollo.gravity import EARTH
from apollo.optimizer import launch_velocity
from apollo.projectile import SphericalProjectile
from apollo.validation import (
    DEFAULT_CASES, closed_form_vacuum, dt_convergence, reference_trajectory,
    vacuum_range, validate_against_reference,
)
from apollo.vector import Vector3
from apollo.weather import WeatherCondition


class TestClosedForm:

    def test_closed_form_at_launch(self):
        assert closed_form_vacuum(20.0, 0.5, 0.2, 9.81, 0.0) == Vector3(0.0, 0.0, 0.0)

    def test_closed_form_returns_to_ground(self):
        g = 9.81
        pitch = np.radians(45.0)
        tof = 2 * 20.0 * np.sin(pitch) / g
        p = closed_form_vacuum(20.0, pitch, 0.0, g, tof)
        assert p.y == pytest.approx(0.0, abs=1e-9)
        assert p.z == pytest.approx(vacuum_range(20.0, pitch, g))

    def test_vacuum_range_45(self):
        assert vacuum_range(20.0, np.radians(45.0), 9.81) == pytest.approx(400.0 / 9.81)


class TestReferenceTrajectory:

    def test_vacuum_reference_matches_closed_form(self):
        pitch = np.radians(45.0)
        sol = reference_trajectory(WeatherCondition.vacuum(), SphericalProjectile(1.0, 0.05),
                                   launch_velocity(20.0, pitch, 0.0))
        impact = sol.y_events[0][0]
        expected = vacuum_range(20.0, pitch, EARTH.surface_gravity())
        assert impact[2] == pytest.approx(expected, rel=1e-4)
        assert impact[1] == pytest.approx(0.0, abs=1e-6)

    def test_drag_reference_shorter_than_vacuum(self):
        v0 = launch_velocity(20.0, np.radians(45.0), 0.0)
        ball = SphericalProjectile(0.15, 0.09)
        air = reference_trajectory(WeatherCondition.standard(), ball, v0)
        vac = reference_trajectory(WeatherCondition.vacuum(), ball, v0)
        assert air.y_events[0][0][2] < vac.y_events[0][0][2]


class TestValidation:

    def test_euler_agrees_with_reference(self):
        results = validate_against_reference(dt=0.01, verbose=False)
        assert len(results) == len(DEFAULT_CASES)
        for r in results:
            assert abs(r.range_error) < 0.5
            assert abs(r.tof_error) < 0.05

    def test_fine_dt_agrees_closely(self):
        result = validate_against_reference(DEFAULT_CASES[:1], dt=0.001, verbose=False)[0]
        assert abs(result.range_error) < 0.05

    def test_verbose_prints_table(self, capsys):
        validate_against_reference(DEFAULT_CASES[:1], dt=0.01, verbose=True)
        out = capsys.readouterr().out
        assert "VALIDATION" in out
        assert DEFAULT_CASES[0].name in out

    def test_dt_convergence_first_order(self):
        errors = dt_convergence()
        errs = [e for _, e in errors]
        assert all(a > b for a, b in zip(errs, errs[1:]))
        for a, b in zip(errs, errs[1:]):
            assert b / a == pytest.approx(0.5, abs=0.05)


if __name__ == "__main__":
    pytest.main([__file__, '-v'])
