"""
Astronomical constants and default engine parameters.

This module consolidates the constants used by the solar and lunar
ephemerides, the weather/twilight blender and the orchestrator so that
every component reads the same values.
"""

import math

# =============================================================================
# Angle and Time Conversion
# =============================================================================

DEG2RAD = math.pi / 180.0
RAD2DEG = 180.0 / math.pi

MINUTES_PER_DAY = 24 * 60
SECONDS_PER_DAY = 24 * 60 * 60

# Julian Date of the J2000.0 epoch (2000-01-01T12:00:00 UTC)
J2000_JD = 2451545.0


# =============================================================================
# Solar Ephemeris (low-order series)
# =============================================================================
# Reference: Astronomy Answers, "Position of the Sun" (Strous), the same
# series used by the widely deployed SunCalc family of libraries.
# =============================================================================

# Obliquity of the ecliptic (Earth's axial tilt), degrees
OBLIQUITY_DEG = 23.4397

# Solar mean anomaly: M = M0 + M1 * d
SOLAR_MEAN_ANOMALY_DEG = 357.5291
SOLAR_MEAN_ANOMALY_RATE_DEG = 0.98560028

# Equation of center coefficients (sin M, sin 2M, sin 3M), degrees
EQUATION_OF_CENTER_DEG = (1.9148, 0.02, 0.0003)

# Perihelion of the Earth, degrees
PERIHELION_DEG = 102.9372

# Sidereal time: theta = S0 + S1 * d - lw
SIDEREAL_TIME_DEG = 280.16
SIDEREAL_RATE_DEG = 360.9856235


# =============================================================================
# Lunar Ephemeris (low-order series)
# =============================================================================

LUNAR_MEAN_ANOMALY_DEG = 134.963
LUNAR_MEAN_ANOMALY_RATE_DEG = 13.064993

LUNAR_MEAN_LONGITUDE_DEG = 218.316
LUNAR_MEAN_LONGITUDE_RATE_DEG = 13.176396

LUNAR_ASCENDING_NODE_DEG = 125.044
LUNAR_ASCENDING_NODE_RATE_DEG = -0.052954

# Periodic perturbation amplitudes, degrees
EVECTION_DEG = 1.274
VARIATION_DEG = 0.658
ANNUAL_EQUATION_DEG = 0.186

# Inclination of the lunar orbit to the ecliptic, degrees
LUNAR_INCLINATION_DEG = 5.128


# =============================================================================
# Twilight Blend
# =============================================================================
# Below TWILIGHT_START_DEG the scene uses the twilight palette only; above
# DAYLIGHT_DEG it uses the weather preset only. Linear in between.
# =============================================================================

TWILIGHT_START_DEG = -6.0
DAYLIGHT_DEG = 4.0

# Added to sin(altitude) before clamping to [0, 1]
ALTITUDE_FACTOR_OFFSET = 0.1

# Ambient floor: max(MIN_FILL_INTENSITY, i * (AMBIENT_NIGHT + AMBIENT_DAY_GAIN * daylight))
MIN_FILL_INTENSITY = 0.05
AMBIENT_NIGHT_FRACTION = 0.3
AMBIENT_DAY_GAIN = 0.7
HEMISPHERE_NIGHT_FRACTION = 0.35
HEMISPHERE_DAY_GAIN = 0.65

# Sun is reported visible only above the horizon and brighter than this
SUN_VISIBILITY_EPSILON = 0.001


# =============================================================================
# Moonlight
# =============================================================================

# Full moon is roughly 400 000 times dimmer than the sun; scaled for display
BASE_MOON_INTENSITY = 0.015
DEFAULT_MIN_MOON_ILLUMINATION = 0.1
MOON_COLOR_HEX = 0xB8C5D6


# =============================================================================
# Engine Defaults
# =============================================================================

DEFAULT_LATITUDE = 51.5072  # London
DEFAULT_LONGITUDE = -0.1276
DEFAULT_DAY_OF_YEAR = 172  # ~June solstice
DEFAULT_TIME_OF_DAY = 12.0
DEFAULT_LIGHT_DISTANCE = 150.0

# UTC-12:00 .. UTC+14:00
MIN_TIMEZONE_OFFSET_MINUTES = -12 * 60
MAX_TIMEZONE_OFFSET_MINUTES = 14 * 60

# Nested recomputes requested from subscribers are deferred, at most this many times
MAX_DEFERRED_RECOMPUTES = 8


# =============================================================================
# Public API
# =============================================================================

__all__ = [
    # Conversions
    "DEG2RAD",
    "RAD2DEG",
    "MINUTES_PER_DAY",
    "SECONDS_PER_DAY",
    "J2000_JD",
    # Solar
    "OBLIQUITY_DEG",
    "SOLAR_MEAN_ANOMALY_DEG",
    "SOLAR_MEAN_ANOMALY_RATE_DEG",
    "EQUATION_OF_CENTER_DEG",
    "PERIHELION_DEG",
    "SIDEREAL_TIME_DEG",
    "SIDEREAL_RATE_DEG",
    # Lunar
    "LUNAR_MEAN_ANOMALY_DEG",
    "LUNAR_MEAN_ANOMALY_RATE_DEG",
    "LUNAR_MEAN_LONGITUDE_DEG",
    "LUNAR_MEAN_LONGITUDE_RATE_DEG",
    "LUNAR_ASCENDING_NODE_DEG",
    "LUNAR_ASCENDING_NODE_RATE_DEG",
    "EVECTION_DEG",
    "VARIATION_DEG",
    "ANNUAL_EQUATION_DEG",
    "LUNAR_INCLINATION_DEG",
    # Twilight
    "TWILIGHT_START_DEG",
    "DAYLIGHT_DEG",
    "ALTITUDE_FACTOR_OFFSET",
    "MIN_FILL_INTENSITY",
    "AMBIENT_NIGHT_FRACTION",
    "AMBIENT_DAY_GAIN",
    "HEMISPHERE_NIGHT_FRACTION",
    "HEMISPHERE_DAY_GAIN",
    "SUN_VISIBILITY_EPSILON",
    # Moonlight
    "BASE_MOON_INTENSITY",
    "DEFAULT_MIN_MOON_ILLUMINATION",
    "MOON_COLOR_HEX",
    # Defaults
    "DEFAULT_LATITUDE",
    "DEFAULT_LONGITUDE",
    "DEFAULT_DAY_OF_YEAR",
    "DEFAULT_TIME_OF_DAY",
    "DEFAULT_LIGHT_DISTANCE",
    "MIN_TIMEZONE_OFFSET_MINUTES",
    "MAX_TIMEZONE_OFFSET_MINUTES",
    "MAX_DEFERRED_RECOMPUTES",
]
