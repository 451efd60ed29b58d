"""Tests for the lunar ephemeris, phase angle and illumination."""

import math

import numpy as np
import pytest
from conftest import utc
from sunlight.components.lunar import (
    elongation,
    illumination_fraction,
    lunar_terms,
    moon_position,
    phase_angle,
)
from sunlight.components.solar import solar_terms
from sunlight.components.time_model import days_since_j2000
from sunlight.models import GeoLocation
from sunlight.presets import moon_phase_name

LONDON = GeoLocation(51.5072, -0.1276)


class TestPhaseMath:
    """Tests for elongation, phase angle and illumination fraction."""

    def test_illumination_zero_at_phase_pi(self):
        assert illumination_fraction(math.pi) == pytest.approx(0.0, abs=1e-12)

    def test_illumination_one_at_phase_zero(self):
        assert illumination_fraction(0.0) == pytest.approx(1.0)

    def test_illumination_half_at_quarter(self):
        assert illumination_fraction(math.pi / 2) == pytest.approx(0.5)

    def test_phase_angle_of_conjunction_is_pi(self):
        """Zero elongation (new moon) maps to a phase angle of +-pi."""
        assert abs(phase_angle(0.0)) == pytest.approx(math.pi)

    def test_phase_angle_of_opposition_is_zero(self):
        assert phase_angle(math.pi) == pytest.approx(0.0, abs=1e-12)

    def test_elongation_wraps(self):
        assert elongation(math.radians(10), math.radians(350)) == pytest.approx(math.radians(20))
        assert elongation(math.radians(350), math.radians(10)) == pytest.approx(math.radians(-20))

    def test_vectorised(self):
        phases = np.array([0.0, math.pi / 2, math.pi])
        np.testing.assert_allclose(illumination_fraction(phases), [1.0, 0.5, 0.0], atol=1e-12)


class TestKnownLunations:
    """
    Published 2024 lunations.

    The series carries only evection, variation and annual equation, so the
    elongation can be several degrees off; tolerances allow for that.
    """

    def test_full_moon(self):
        moon = moon_position(utc(2024, 1, 25, 17, 54), LONDON)
        assert moon.illumination > 0.97
        assert abs(moon.phase_angle) < math.radians(20)
        assert moon_phase_name(moon.elongation) == "Full Moon"

    def test_new_moon(self):
        moon = moon_position(utc(2024, 1, 11, 11, 57), LONDON)
        assert moon.illumination < 0.03
        assert abs(moon.phase_angle) > math.radians(160)
        assert moon_phase_name(moon.elongation) == "New Moon"

    def test_first_quarter_is_waxing(self):
        moon = moon_position(utc(2024, 1, 18, 3, 53), LONDON)
        assert moon.illumination == pytest.approx(0.5, abs=0.15)
        assert moon.is_waxing
        assert moon_phase_name(moon.elongation) == "First Quarter"

    def test_last_quarter_is_waning(self):
        moon = moon_position(utc(2024, 2, 2, 23, 18), LONDON)
        assert moon.illumination == pytest.approx(0.5, abs=0.15)
        assert not moon.is_waxing
        assert moon_phase_name(moon.elongation) == "Last Quarter"

    def test_phase_is_independent_of_location(self):
        instant = utc(2024, 5, 3, 6)
        here = moon_position(instant, LONDON)
        there = moon_position(instant, GeoLocation(-33.87, 151.21))
        assert here.illumination == pytest.approx(there.illumination)
        assert here.altitude != pytest.approx(there.altitude)


class TestLunarTerms:
    """Tests for the full lunar evaluation."""

    def test_reuses_supplied_solar_terms(self):
        instant = utc(2024, 7, 4, 22)
        sun = solar_terms(days_since_j2000(instant), LONDON.latitude, LONDON.longitude)
        assert moon_position(instant, LONDON, sun=sun) == moon_position(instant, LONDON)

    def test_ecliptic_latitude_bounded_by_inclination(self):
        days = np.linspace(8000.0, 8030.0, 121)
        sun = solar_terms(days, 0.0, 0.0)
        terms = lunar_terms(sun, 0.0, 0.0)
        assert np.all(np.abs(terms.ecliptic_latitude) <= math.radians(5.2))

    def test_illumination_in_unit_interval(self):
        days = np.linspace(8000.0, 8060.0, 241)
        terms = lunar_terms(solar_terms(days, 10.0, 20.0), 10.0, 20.0)
        assert np.all((terms.illumination >= 0.0) & (terms.illumination <= 1.0))
        assert terms.illumination.max() > 0.99
        assert terms.illumination.min() < 0.01
