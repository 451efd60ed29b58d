"""
Tests for structured error handling.

Errors are only raised at configuration boundaries; the computation path
clamps, wraps or propagates NaN instead.
"""

import math

import pytest
from conftest import make_engine, utc
from sunlight import ConfigurationError, PresetTableError, SunlightError, compute_lighting
from sunlight.readout import summarize_state


class TestSunlightErrorHierarchy:
    """Tests for the error class hierarchy."""

    def test_sunlight_error_is_base_exception(self):
        """SunlightError can be used to catch all sunlight errors."""
        assert isinstance(SunlightError("Test error"), Exception)

    def test_configuration_error_has_fields(self):
        error = ConfigurationError("light_distance", "must be > 0, got -1")
        assert isinstance(error, SunlightError)
        assert error.parameter == "light_distance"
        assert error.reason == "must be > 0, got -1"
        assert "light_distance" in str(error)

    def test_preset_table_error_has_fields(self):
        error = PresetTableError("overcast", "missing key 'sun_color'")
        assert isinstance(error, SunlightError)
        assert error.preset == "overcast"
        assert "sun_color" in str(error)


class TestComputationNeverRaises:
    """Out-of-range input on the computation path is coerced, not rejected."""

    def test_extreme_coordinates(self):
        state = compute_lighting(1000.0, -1000.0, utc(2023, 6, 21, 12))
        assert state.location.latitude == 90.0
        assert -180.0 < state.location.longitude <= 180.0

    def test_engine_mutators_coerce(self):
        engine = make_engine()
        engine.set_latitude(-500.0)
        engine.set_longitude(725.0)
        engine.set_day_of_year(-3)
        engine.set_time_of_day(-0.5)
        engine.set_timezone_offset(99999)
        assert engine.get_location().latitude == -90.0
        assert engine.get_location().longitude == pytest.approx(5.0)
        assert engine.get_day_of_year() == 1
        assert engine.get_time_of_day() == pytest.approx(23.5)
        assert engine.get_timezone_offset() == 840

    def test_nan_longitude_propagates(self):
        engine = make_engine()
        engine.set_longitude(float("nan"))
        assert math.isnan(engine.get_state().sun.azimuth)

    @pytest.mark.parametrize("mutator", ["set_time_of_day", "set_day_of_year", "set_timezone_offset"])
    def test_nan_time_publishes_nan_angles(self, mutator):
        engine = make_engine()
        states = []
        engine.on("state-changed", states.append)

        getattr(engine, mutator)(float("nan"))

        assert len(states) == 1
        state = states[0]
        assert state.instant is None
        assert math.isnan(state.sun.altitude)
        assert math.isnan(state.sun.azimuth)
        assert math.isnan(state.moon.altitude)
        assert math.isnan(state.sun_direction[1])

    def test_engine_keeps_working_after_nan_time(self):
        engine = make_engine()
        engine.set_time_of_day(float("nan"))
        states = []
        engine.on("state-changed", states.append)

        engine.set_time_of_day(float("nan"))
        assert states == []

        engine.set_latitude(10.0)
        assert len(states) == 1
        assert states[0].location.latitude == 10.0
        assert math.isnan(states[0].sun.altitude)

        engine.set_time_of_day(12.0)
        assert states[-1].instant == utc(2023, 6, 21, 12)
        assert not math.isnan(states[-1].sun.altitude)

    def test_nan_state_serializes_and_summarizes(self):
        engine = make_engine()
        engine.set_time_of_day(float("nan"))
        state = engine.get_state()

        data = state.to_dict()
        assert data["instant"] is None
        assert math.isnan(data["sun"]["altitude_deg"])
        assert summarize_state(state, engine.get_timezone_offset())[0] == "Local Time: --:--"

    def test_repeated_nan_latitude_is_a_no_op(self):
        engine = make_engine()
        engine.set_latitude(float("nan"))
        states = []
        engine.on("state-changed", states.append)
        engine.set_latitude(float("nan"))
        assert states == []

    def test_unknown_weather_on_mutator(self):
        engine = make_engine()
        with pytest.raises(ConfigurationError):
            engine.set_weather("sleet")
        assert engine.get_weather().value == "sunny"
