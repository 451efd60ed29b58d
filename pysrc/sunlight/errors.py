"""Sunlight error types for actionable error messages.

The ephemeris and blending math never raises: out-of-range coordinates and
times are clamped or normalized. These exceptions are only raised at the
configuration boundary, where a value cannot be coerced into something
meaningful.

Example:
    try:
        engine = SunLightEngine(SunlightConfig(weather="foggy"))
    except sunlight.ConfigurationError as e:
        print(f"Bad option '{e.parameter}': {e.reason}")
"""

from __future__ import annotations


class SunlightError(Exception):
    """Base class for all sunlight errors."""

    pass


class ConfigurationError(SunlightError):
    """Raised when configuration is invalid or inconsistent.

    Attributes:
        parameter: The problematic parameter name.
        reason: Why the configuration is invalid.
    """

    def __init__(self, parameter: str, reason: str):
        self.parameter = parameter
        self.reason = reason
        message = f"Invalid configuration for '{parameter}': {reason}"
        super().__init__(message)


class PresetTableError(SunlightError):
    """Raised when a weather preset table is missing required entries.

    Custom preset tables can be loaded from JSON (see ``config.load_presets``).
    Every preset must define the full set of intensities and colors, and
    the table must define the twilight palette.

    Attributes:
        preset: Name of the offending preset (or "twilight").
        reason: What is missing or malformed.

    Example:
        >>> load_presets("broken.json")
        PresetTableError: Invalid preset table entry 'overcast': missing key 'sun_color'
    """

    def __init__(self, preset: str, reason: str):
        self.preset = preset
        self.reason = reason
        message = f"Invalid preset table entry '{preset}': {reason}"
        super().__init__(message)
