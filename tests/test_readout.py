"""Tests for human-readable readout formatting."""

import pytest
from conftest import make_engine, utc
from sunlight import compute_lighting
from sunlight.readout import (
    format_day_of_year,
    format_time_of_day,
    format_utc_offset,
    local_time,
    summarize_state,
)


class TestFormatters:
    @pytest.mark.parametrize(
        "minutes,expected",
        [(0, "UTC+0"), (540, "UTC+9"), (-420, "UTC-7"), (-210, "UTC-3:30"), (345, "UTC+5:45"), (-30, "UTC-0:30")],
    )
    def test_utc_offset(self, minutes, expected):
        assert format_utc_offset(minutes) == expected

    def test_utc_offset_nan(self):
        assert format_utc_offset(float("nan")) == "UTC?"

    @pytest.mark.parametrize(
        "hours,expected",
        [(0.0, "00:00"), (7.5, "07:30"), (13.999, "13:59"), (24.0, "24:00"), (-1.0, "00:00"), (30.0, "24:00")],
    )
    def test_time_of_day(self, hours, expected):
        assert format_time_of_day(hours) == expected

    def test_day_of_year(self):
        assert format_day_of_year(172, 2023) == "Jun 21"
        assert format_day_of_year(60, 2024) == "Feb 29"
        assert format_day_of_year(60, 2023) == "Mar 1"

    def test_day_of_year_clamped(self):
        assert format_day_of_year(0, 2023) == "Jan 1"
        assert format_day_of_year(400, 2023) == "Dec 31"

    def test_local_time(self):
        local = local_time(utc(2023, 6, 21, 3), 540)
        assert (local.hour, local.day) == (12, 21)


class TestSummarizeState:
    def test_lines(self):
        state = compute_lighting(51.5072, -0.1276, utc(2024, 1, 25, 22), weather="overcast")
        lines = summarize_state(state, offset_minutes=0)
        assert lines[0] == "Local Time: 22:00 (Jan 25, UTC+0)"
        assert lines[1].startswith("Sun Altitude: -")
        assert lines[2].endswith("° from North")
        assert lines[3] == "Weather: overcast"
        assert lines[4].startswith("Moon Phase: Full Moon (")
        assert lines[5].endswith("(visible)")

    def test_offset_shifts_local_time(self):
        engine = make_engine(timezone_offset_minutes=540, time_of_day=6.25)
        lines = summarize_state(engine.get_state(), engine.get_timezone_offset())
        assert lines[0] == "Local Time: 06:15 (Jun 21, UTC+9)"

    def test_no_moon_lines_when_disabled(self):
        state = compute_lighting(0.0, 0.0, utc(2023, 3, 21, 12), enable_moon=False)
        assert len(summarize_state(state)) == 4
