"""Tests for location presets and moon phase naming."""

import math

import pytest
from sunlight.presets import LOCATION_PRESETS, MOON_PHASE_NAMES, find_matching_preset, moon_phase_name


class TestLocationPresets:
    def test_known_presets(self):
        assert set(LOCATION_PRESETS) == {"san_francisco", "london", "dubai", "tokyo", "sydney", "reykjavik"}

    def test_offsets(self):
        assert LOCATION_PRESETS["tokyo"].utc_offset_minutes == 540
        assert LOCATION_PRESETS["san_francisco"].utc_offset_minutes == -420
        assert LOCATION_PRESETS["reykjavik"].utc_offset_minutes == 0

    def test_exact_match(self):
        for key, preset in LOCATION_PRESETS.items():
            assert find_matching_preset(preset.latitude, preset.longitude, preset.utc_offset_minutes) == key

    def test_match_within_tolerance(self):
        assert find_matching_preset(35.70, 139.70, 530) == "tokyo"

    def test_latitude_out_of_tolerance(self):
        assert find_matching_preset(35.75, 139.6503, 540) is None

    def test_offset_out_of_tolerance(self):
        assert find_matching_preset(35.6762, 139.6503, 500) is None

    def test_no_match(self):
        assert find_matching_preset(0.0, 0.0, 0) is None


class TestMoonPhaseName:
    @pytest.mark.parametrize(
        "elongation_deg,name",
        [
            (0.0, "New Moon"),
            (20.0, "New Moon"),
            (-20.0, "New Moon"),
            (45.0, "Waxing Crescent"),
            (90.0, "First Quarter"),
            (135.0, "Waxing Gibbous"),
            (180.0, "Full Moon"),
            (-180.0, "Full Moon"),
            (-135.0, "Waning Gibbous"),
            (-90.0, "Last Quarter"),
            (-45.0, "Waning Crescent"),
        ],
    )
    def test_sectors(self, elongation_deg, name):
        assert moon_phase_name(math.radians(elongation_deg)) == name

    def test_every_name_reachable(self):
        names = {moon_phase_name(math.radians(d)) for d in range(0, 360, 5)}
        assert names == set(MOON_PHASE_NAMES)

    def test_nan(self):
        assert moon_phase_name(float("nan")) == "Unknown"
