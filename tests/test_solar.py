"""
Tests for the solar ephemeris.

Reference values are from the low-order series itself cross-checked
against published almanac positions; tolerances reflect the series'
accuracy rather than float noise.
"""

import math
from datetime import date

import numpy as np
import pytest
from conftest import utc
from sunlight.components.solar import (
    ecliptic_longitude,
    max_solar_altitude,
    solar_mean_anomaly,
    solar_terms,
    sun_path,
    sun_position,
)
from sunlight.components.time_model import days_since_j2000, manual_instant
from sunlight.models import GeoLocation


class TestReferencePositions:
    """Known sun altitudes at reference instants."""

    def test_equinox_noon_at_equator_is_near_zenith(self):
        """lat 0, lon 0, day 80, 12:00 UTC: within 2.5° of the zenith (equation of time)."""
        instant = manual_instant(2023, 80, 12.0, 0)
        pos = sun_position(instant, GeoLocation(0.0, 0.0))
        assert pos.altitude_deg == pytest.approx(90.0, abs=2.5)

    def test_june_solstice_noon_london(self):
        """lat 51.5, lon 0, day 172, 12:00 UTC: altitude about 61.9°."""
        instant = manual_instant(2023, 172, 12.0, 0)
        pos = sun_position(instant, GeoLocation(51.5, 0.0))
        assert pos.altitude_deg == pytest.approx(61.9, abs=1.0)

    def test_december_solstice_noon_london(self):
        """Winter noon altitude is 90 - 51.5 - 23.44, about 15°."""
        pos = sun_position(utc(2023, 12, 21, 12), GeoLocation(51.5, 0.0))
        assert pos.altitude_deg == pytest.approx(15.0, abs=1.0)

    def test_noon_sun_is_south_in_northern_hemisphere(self):
        pos = sun_position(utc(2023, 6, 21, 12), GeoLocation(51.5, 0.0))
        assert pos.compass_bearing == pytest.approx(180.0, abs=5.0)

    def test_noon_sun_is_north_in_southern_hemisphere(self):
        pos = sun_position(utc(2023, 6, 21, 2), GeoLocation(-33.87, 151.21))
        bearing = pos.compass_bearing
        assert min(bearing, 360.0 - bearing) < 10.0

    def test_midnight_sun_is_below_horizon(self):
        pos = sun_position(utc(2023, 6, 21, 0), GeoLocation(51.5, 0.0))
        assert pos.altitude < 0

    def test_naive_datetime_is_utc(self):
        aware = sun_position(utc(2023, 6, 21, 15), GeoLocation(40.0, -3.7))
        naive = sun_position(utc(2023, 6, 21, 15).replace(tzinfo=None), GeoLocation(40.0, -3.7))
        assert naive == aware


class TestSeriesTerms:
    """Tests for the individual series terms."""

    def test_mean_anomaly_at_j2000(self):
        assert solar_mean_anomaly(0.0) == pytest.approx(math.radians(357.5291))

    def test_ecliptic_longitude_near_zero_at_march_equinox(self):
        days = days_since_j2000(utc(2023, 3, 20, 21, 24))
        lon = float(ecliptic_longitude(solar_mean_anomaly(days)))
        wrapped = math.atan2(math.sin(lon), math.cos(lon))
        assert math.degrees(wrapped) == pytest.approx(0.0, abs=0.5)

    def test_declination_at_june_solstice(self):
        terms = solar_terms(days_since_j2000(utc(2023, 6, 21, 14, 58)), 0.0, 0.0)
        assert math.degrees(float(terms.declination)) == pytest.approx(23.44, abs=0.1)

    def test_array_input_matches_scalar(self):
        days = np.array([8000.0, 8000.25, 8000.5])
        batch = solar_terms(days, 48.85, 2.35)
        for i, d in enumerate(days):
            single = solar_terms(float(d), 48.85, 2.35)
            assert batch.altitude[i] == pytest.approx(float(single.altitude))
            assert batch.azimuth[i] == pytest.approx(float(single.azimuth))


class TestPolarCases:
    """No special-casing: polar day and night fall out of the formulas."""

    def test_polar_day(self):
        path = sun_path(GeoLocation(89.0, 0.0), date(2023, 6, 21))
        assert np.all(path.altitude > 0)

    def test_polar_night(self):
        path = sun_path(GeoLocation(-89.0, 0.0), date(2023, 6, 21))
        assert np.all(path.altitude < 0)

    def test_poles_do_not_produce_nan(self):
        for lat in (90.0, -90.0):
            pos = sun_position(utc(2023, 3, 1, 6), GeoLocation(lat, 0.0))
            assert math.isfinite(pos.altitude)
            assert math.isfinite(pos.azimuth)


class TestSunPath:
    """Tests for day-track sampling."""

    def test_default_step_gives_96_samples(self):
        path = sun_path(GeoLocation(51.5, 0.0), date(2023, 6, 21))
        assert path.hours.shape == (96,)
        assert path.altitude.shape == (96,)
        assert path.hours[0] == 0.0

    def test_london_summer_daylight(self):
        path = sun_path(GeoLocation(51.5, 0.0), date(2023, 6, 21))
        assert 15.5 < path.daylight_hours < 17.5

    def test_equator_equinox_daylight(self):
        path = sun_path(GeoLocation(0.0, 0.0), date(2023, 3, 21))
        assert 11.5 < path.daylight_hours < 12.75

    def test_timezone_offset_shifts_peak_to_local_noon(self):
        tokyo = GeoLocation(35.68, 139.65)
        path = sun_path(tokyo, date(2023, 6, 21), step_minutes=5, timezone_offset_minutes=540)
        peak_hour = path.hours[int(np.argmax(path.altitude))]
        assert peak_hour == pytest.approx(11.7, abs=0.5)

    def test_max_solar_altitude_matches_noon(self):
        altitude = max_solar_altitude(GeoLocation(51.5, 0.0), date(2023, 6, 21))
        assert math.degrees(altitude) == pytest.approx(61.9, abs=1.0)
