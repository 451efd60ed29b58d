"""
Public sunlight API

Collects the types and entry points a host needs in one module:

- ``SunLightEngine`` for interactive scenes (mutators, ticks, events)
- ``compute_lighting`` for one-off snapshots without an engine
- ``LightRig`` and the sink protocols for pushing snapshots into lights

Example:
    import sunlight
    from datetime import datetime, timezone

    state = sunlight.compute_lighting(
        latitude=51.5072,
        longitude=-0.1276,
        instant=datetime(2024, 6, 21, 19, 30, tzinfo=timezone.utc),
        weather="partly-cloudy",
    )
    print(f"Sun altitude: {state.sun.altitude_deg:.1f}°")
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from .components.lunar import moon_position
from .components.projection import compute_state
from .components.solar import SunPath, max_solar_altitude, sun_path, sun_position
from .config import cached_presets, load_presets
from .constants import DEFAULT_LIGHT_DISTANCE, DEFAULT_MIN_MOON_ILLUMINATION
from .engine import SunLightEngine
from .errors import ConfigurationError, PresetTableError, SunlightError
from .events import EventEmitter, SunlightEvent
from .models import (
    CelestialPosition,
    Color,
    GeoLocation,
    HelperOptions,
    LightingState,
    LunarPosition,
    Photometry,
    SunlightConfig,
    TimeState,
    WeatherPreset,
)
from .presets import LOCATION_PRESETS, LocationPreset, find_matching_preset, moon_phase_name
from .readout import format_day_of_year, format_time_of_day, format_utc_offset, summarize_state
from .sinks import HelperSink, HemisphereSink, LightRig, LightSink


def compute_lighting(
    latitude: float,
    longitude: float,
    instant: datetime,
    weather: WeatherPreset | str = WeatherPreset.SUNNY,
    enable_moon: bool = True,
    light_distance: float = DEFAULT_LIGHT_DISTANCE,
    min_moon_illumination: float = DEFAULT_MIN_MOON_ILLUMINATION,
    presets_path: str | Path | None = None,
) -> LightingState:
    """
    Compute a single lighting snapshot without creating an engine.

    Runs the same pass as ``SunLightEngine`` for one instant. Location
    values are clamped/normalized rather than rejected.

    Args:
        latitude: Degrees, north positive.
        longitude: Degrees, east positive.
        instant: Instant to evaluate. Naive datetimes are taken as UTC.
        weather: Weather preset or its name. Default "sunny".
        enable_moon: Include the moon. Default True.
        light_distance: Length of the placement vectors. Default 150.
        min_moon_illumination: Lit fraction below which the moon is
            reported invisible. Default 0.1.
        presets_path: Optional custom weather preset table.

    Returns:
        LightingState for the instant.

    Raises:
        ConfigurationError: If the weather name is unknown or a numeric
            option is out of range.
    """
    weather = WeatherPreset.parse(weather)
    if not light_distance > 0:
        raise ConfigurationError("light_distance", f"must be > 0, got {light_distance}")
    if not 0 <= min_moon_illumination <= 1:
        raise ConfigurationError("min_moon_illumination", f"must be in [0, 1], got {min_moon_illumination}")

    tables = load_presets(presets_path) if presets_path is not None else cached_presets()
    return compute_state(
        instant,
        GeoLocation(latitude, longitude),
        weather,
        enable_moon=enable_moon,
        light_distance=light_distance,
        min_moon_illumination=min_moon_illumination,
        tables=tables,
    )


__all__ = [
    # Engine
    "SunLightEngine",
    "SunlightConfig",
    "HelperOptions",
    "SunlightEvent",
    "EventEmitter",
    # One-shot computation
    "compute_lighting",
    "sun_position",
    "moon_position",
    "sun_path",
    "max_solar_altitude",
    "SunPath",
    # Models
    "GeoLocation",
    "TimeState",
    "CelestialPosition",
    "LunarPosition",
    "Color",
    "WeatherPreset",
    "Photometry",
    "LightingState",
    # Sinks
    "LightSink",
    "HemisphereSink",
    "HelperSink",
    "LightRig",
    # Presets and readout
    "LOCATION_PRESETS",
    "LocationPreset",
    "find_matching_preset",
    "moon_phase_name",
    "format_utc_offset",
    "format_time_of_day",
    "format_day_of_year",
    "summarize_state",
    # Configuration loading
    "load_presets",
    # Errors
    "SunlightError",
    "ConfigurationError",
    "PresetTableError",
]
