"""
Named locations and moon phase naming.

LOCATION_PRESETS mirrors the quick-pick list offered by lighting control
panels; ``find_matching_preset`` recognises when hand-entered coordinates
land on one of them again.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class LocationPreset:
    """
    A named observer location with its usual UTC offset.

    Attributes:
        label: Display name.
        latitude: Degrees, north positive.
        longitude: Degrees, east positive.
        utc_offset_minutes: Local time minus UTC.
    """

    label: str
    latitude: float
    longitude: float
    utc_offset_minutes: int


LOCATION_PRESETS: dict[str, LocationPreset] = {
    "san_francisco": LocationPreset("San Francisco, USA", 37.7749, -122.4194, -420),
    # BST (UTC+1); use 0 for GMT in winter
    "london": LocationPreset("London, UK", 51.5072, -0.1276, 60),
    "dubai": LocationPreset("Dubai, UAE", 25.276987, 55.296249, 240),
    "tokyo": LocationPreset("Tokyo, Japan", 35.6762, 139.6503, 540),
    "sydney": LocationPreset("Sydney, Australia", -33.8688, 151.2093, 600),
    "reykjavik": LocationPreset("Reykjavík, Iceland", 64.1466, -21.9426, 0),
}

# Matching tolerances for find_matching_preset
LATITUDE_TOLERANCE_DEG = 0.05
LONGITUDE_TOLERANCE_DEG = 0.1
OFFSET_TOLERANCE_MINUTES = 15


def find_matching_preset(latitude: float, longitude: float, utc_offset_minutes: float = 0.0) -> str | None:
    """
    Return the key of the first preset within tolerance, or None.

    Args:
        latitude: Degrees.
        longitude: Degrees.
        utc_offset_minutes: Offset to compare against the preset's offset.

    Example:
        >>> find_matching_preset(35.68, 139.7, 540)
        'tokyo'
    """
    for key, preset in LOCATION_PRESETS.items():
        if (
            abs(preset.latitude - latitude) <= LATITUDE_TOLERANCE_DEG
            and abs(preset.longitude - longitude) <= LONGITUDE_TOLERANCE_DEG
            and abs(preset.utc_offset_minutes - utc_offset_minutes) <= OFFSET_TOLERANCE_MINUTES
        ):
            return key
    return None


MOON_PHASE_NAMES = (
    "New Moon",
    "Waxing Crescent",
    "First Quarter",
    "Waxing Gibbous",
    "Full Moon",
    "Waning Gibbous",
    "Last Quarter",
    "Waning Crescent",
)


def moon_phase_name(elongation: float) -> str:
    """
    Name the moon phase for an elongation (moon minus sun ecliptic longitude).

    Each name covers a 45° sector centred on its nominal elongation, so
    "New Moon" spans -22.5° to 22.5°.

    Args:
        elongation: Radians, any range. 0 is new moon, pi is full moon.

    Returns:
        One of MOON_PHASE_NAMES, or "Unknown" for a NaN elongation.
    """
    if math.isnan(elongation):
        return "Unknown"
    fraction = (elongation / (2 * math.pi)) % 1.0
    index = int(math.floor((fraction + 1.0 / 16.0) * 8)) % 8
    return MOON_PHASE_NAMES[index]
