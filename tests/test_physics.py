"""
Unit Tests for the Physical Models
==================================
Vector math, gravity, gas/compound density, drag, weather and projectiles.
Run: python -m pytest tests/ -v
"""

import sys
import os
import numpy as np
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from apollo.vector import Vector3
from apollo.gravity import G, EARTH, GravitationalBody
from apollo.aerodynamics import (
    Gas, DryAir, WaterVapor, Compound, CompoundGas, drag,
    R_DRY_AIR, R_WATER_VAPOR,
)
from apollo.weather import (
    WeatherCondition, WeatherConditionWind, wind_direction_from_degrees,
)
from apollo.projectile import Projectile, SphericalProjectile, SPHERE_DRAG_COEFFICIENT


class TestVector3:

    def test_add_subtract(self):
        a = Vector3(1.0, 2.0, 3.0)
        b = Vector3(0.5, -1.0, 2.0)
        assert a + b == Vector3(1.5, 1.0, 5.0)
        assert a - b == Vector3(0.5, 3.0, 1.0)
        assert a.add(b) == a + b

    def test_scale_and_operators(self):
        v = Vector3(1.0, -2.0, 0.5)
        assert v * 2 == Vector3(2.0, -4.0, 1.0)
        assert 2 * v == v.scale(2)
        assert -v == Vector3(-1.0, 2.0, -0.5)

    def test_length(self):
        assert Vector3(3.0, 4.0, 0.0).length() == pytest.approx(5.0)
        assert Vector3(1.0, 2.0, 2.0).length() == pytest.approx(3.0)

    def test_normalize(self):
        n = Vector3(0.0, 0.0, 7.5).normalize()
        assert n.z == pytest.approx(1.0)
        assert Vector3(1.0, 1.0, 1.0).normalize().length() == pytest.approx(1.0)

    def test_normalize_zero_vector_is_nan(self):
        with np.errstate(invalid='ignore', divide='ignore'):
            n = Vector3.zero().normalize()
        assert all(np.isnan(c) for c in n)

    def test_immutable(self):
        v = Vector3(1.0, 2.0, 3.0)
        with pytest.raises(Exception):
            v.x = 5.0

    def test_array_round_trip(self):
        v = Vector3(1.0, 2.0, 3.0)
        assert np.allclose(v.to_array(), [1.0, 2.0, 3.0])
        assert Vector3.from_array(v.to_array()) == v

    def test_distance(self):
        assert Vector3(1.0, 0.0, 0.0).distance_to(Vector3(1.0, 3.0, 4.0)) == pytest.approx(5.0)


class TestGravity:

    def test_constants(self):
        assert G == pytest.approx(6.67430e-11)
        assert EARTH.mass == pytest.approx(5.972e24)
        assert EARTH.radius == 6_371_000.0

    def test_force_points_down(self):
        assert EARTH.force_on_object(0.0, 1.0) < 0

    def test_surface_gravity(self):
        """Sea-level acceleration ~9.82 m/s² with these constants."""
        assert EARTH.surface_gravity() == pytest.approx(9.82, abs=0.01)

    def test_force_scales_with_mass(self):
        assert EARTH.force_on_object(0.0, 2.0) == pytest.approx(2 * EARTH.force_on_object(0.0, 1.0))

    def test_inverse_square(self):
        body = GravitationalBody(mass=1.0e20, radius=1000.0)
        f_surface = body.force_on_object(0.0, 1.0)
        f_double = body.force_on_object(1000.0, 1.0)
        assert f_double == pytest.approx(f_surface / 4.0)

    def test_force_weakens_with_altitude(self):
        assert abs(EARTH.force_on_object(10000.0, 1.0)) < abs(EARTH.force_on_object(0.0, 1.0))

    def test_negative_altitude_not_special_cased(self):
        """Below the reference radius the inverse-square law still applies."""
        f = EARTH.force_on_object(-1000.0, 1.0)
        expected = -G * EARTH.mass / (EARTH.radius - 1000.0) ** 2
        assert f == pytest.approx(expected)


class TestAerodynamics:

    def test_dry_air_density_sea_level(self):
        assert DryAir(101325.0, 288.15).density == pytest.approx(1.225, abs=1e-3)

    def test_gas_constants(self):
        assert DryAir(1.0, 1.0).r == R_DRY_AIR == 287.058
        assert WaterVapor(1.0, 1.0).r == R_WATER_VAPOR == 461.5

    def test_gas_density_formula(self):
        gas = Gas(r=300.0, pressure=90000.0, temperature=250.0)
        assert gas.density == pytest.approx(90000.0 / (300.0 * 250.0))

    def test_water_vapor_lighter_than_dry_air(self):
        assert WaterVapor(101325.0, 288.15).density < DryAir(101325.0, 288.15).density

    def test_compound_weighted_sum(self):
        dry = DryAir(101325.0, 288.15)
        vapor = WaterVapor(101325.0, 288.15)
        compound = Compound([CompoundGas(dry, 0.7), CompoundGas(vapor, 0.3)])
        assert compound.density == pytest.approx(0.7 * dry.density + 0.3 * vapor.density)

    def test_compound_fractions_not_normalized(self):
        dry = DryAir(101325.0, 288.15)
        compound = Compound([CompoundGas(dry, 1.0), CompoundGas(dry, 1.0)])
        assert compound.density == pytest.approx(2.0 * dry.density)

    def test_empty_compound(self):
        assert Compound([]).density == 0.0

    def test_zero_temperature_gives_infinite_density(self):
        with np.errstate(divide='ignore'):
            assert np.isinf(DryAir(101325.0, 0.0).density)

    def test_drag_magnitude_and_direction(self):
        F = drag(Vector3(10.0, 0.0, 0.0), Vector3.zero(), gas_density=1.0,
                 cross_section_area=1.0, drag_coefficient=1.0)
        assert F.x == pytest.approx(-50.0)
        assert F.y == pytest.approx(0.0)
        assert F.z == pytest.approx(0.0)

    def test_drag_force_opposes_motion(self):
        v = Vector3(100.0, 50.0, 0.0)
        F = drag(v, Vector3.zero(), 1.225, 0.01, 0.3)
        assert F.dot(v) < 0

    def test_drag_follows_wind(self):
        """A resting object is pushed along the wind direction."""
        F = drag(Vector3.zero(), Vector3(0.0, 0.0, 5.0), 1.225, 0.01, 0.47)
        assert F.z > 0
        assert F.z == pytest.approx(0.5 * 1.225 * 25.0 * 0.47 * 0.01)

    def test_drag_zero_relative_velocity_is_zero(self):
        """No relative flow: zero force, not NaN."""
        v = Vector3(3.0, -1.0, 2.0)
        F = drag(v, v, 1.225, 0.01, 0.47)
        assert F == Vector3.zero()

    def test_drag_zero_density(self):
        F = drag(Vector3(10.0, 0.0, 0.0), Vector3.zero(), 0.0, 1.0, 1.0)
        assert F.length() == 0.0


class TestWeather:

    def test_wind_velocity_vector(self):
        w = WeatherConditionWind(speed=2.0, direction=0.0)
        v = w.velocity_vector
        assert (v.x, v.y, v.z) == pytest.approx((2.0, 0.0, 0.0))

        w = WeatherConditionWind(speed=3.0, direction=np.pi / 2)
        v = w.velocity_vector
        assert (v.x, v.y, v.z) == pytest.approx((0.0, 0.0, 3.0), abs=1e-12)

    def test_wind_direction_from_degrees(self):
        assert wind_direction_from_degrees(180.0) == pytest.approx(np.pi)

    def test_dry_compound_density(self):
        w = WeatherCondition.from_scalars(temperature=288.0, pressure=101325.0, humidity=0.0)
        assert w.air_density == pytest.approx(DryAir(101325.0, 288.0).density)

    def test_humid_air_is_lighter(self):
        # Water vapor is mixed in at the humidity fraction; a dry-air-only
        # compound would drop to zero density at full humidity instead.
        dry = WeatherCondition.from_scalars(humidity=0.0)
        humid = WeatherCondition.from_scalars(humidity=1.0)
        assert humid.air_density < dry.air_density
        assert humid.air_density == pytest.approx(WaterVapor(101325.0, 288.15).density)

    def test_compound_fractions(self):
        w = WeatherCondition.from_scalars(humidity=0.25)
        fractions = [c.fraction for c in w.air_compound.gasses]
        assert fractions == pytest.approx([0.75, 0.25])

    def test_standard_and_vacuum(self):
        assert WeatherCondition.standard().air_density == pytest.approx(1.225, abs=1e-3)
        assert WeatherCondition.standard().wind_velocity == Vector3.zero()
        assert WeatherCondition.vacuum().air_density == 0.0


class TestProjectile:

    def test_base_has_no_area(self):
        p = Projectile(mass=1.0, drag_coefficient=0.5)
        with pytest.raises(NotImplementedError):
            p.projected_area()

    def test_sphere_area(self):
        p = SphericalProjectile(mass=0.15, radius=0.09)
        assert p.projected_area() == pytest.approx(np.pi * 0.09 ** 2)

    def test_sphere_drag_coefficient(self):
        p = SphericalProjectile(mass=0.15, radius=0.09)
        assert p.drag_coefficient == SPHERE_DRAG_COEFFICIENT == 0.47
        assert p.mass == 0.15
        assert p.diameter == pytest.approx(0.18)

    def test_custom_shape(self):
        class Plate(Projectile):
            def __init__(self, mass, side):
                super().__init__(mass, 1.28)
                self.side = side

            def projected_area(self):
                return self.side ** 2

        assert Plate(1.0, 0.5).projected_area() == pytest.approx(0.25)


if __name__ == "__main__":
    pytest.main([__file__, '-v'])
