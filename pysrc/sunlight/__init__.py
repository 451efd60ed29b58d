"""sunlight - Sun and moon lighting state for 3D scenes.

Computes where the sun and moon are for a location and moment, how bright
the moon is, and blends that with a weather preset and a twilight fade
into one consistent lighting snapshot that a host pushes into its lights.

Quick start::

    import sunlight

    engine = sunlight.SunLightEngine(sunlight.SunlightConfig(latitude=35.68, longitude=139.65))
    engine.on("state-changed", lambda state: print(f"Sun {state.sun.altitude_deg:.1f}°"))
    engine.set_time_of_day(18.25)
    engine.set_weather("partly-cloudy")

One-off snapshots::

    from datetime import datetime, timezone

    state = sunlight.compute_lighting(51.5, -0.13, datetime(2024, 12, 21, 15, tzinfo=timezone.utc))
    print(state.moon_phase_name, state.sun_visible)
"""

from importlib.metadata import PackageNotFoundError, version

# Version: single source of truth is pyproject.toml
try:
    __version__ = version("sunlight")
except PackageNotFoundError:
    __version__ = "0.0.0.dev0"  # Fallback for source checkouts without metadata

from .api import (  # noqa: E402
    LOCATION_PRESETS,
    CelestialPosition,
    Color,
    ConfigurationError,
    EventEmitter,
    GeoLocation,
    HelperOptions,
    HelperSink,
    HemisphereSink,
    LightingState,
    LightRig,
    LightSink,
    LocationPreset,
    LunarPosition,
    Photometry,
    PresetTableError,
    SunlightConfig,
    SunlightError,
    SunlightEvent,
    SunLightEngine,
    SunPath,
    TimeState,
    WeatherPreset,
    compute_lighting,
    find_matching_preset,
    format_day_of_year,
    format_time_of_day,
    format_utc_offset,
    load_presets,
    max_solar_altitude,
    moon_phase_name,
    moon_position,
    summarize_state,
    sun_path,
    sun_position,
)

__all__ = [
    "__version__",
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
