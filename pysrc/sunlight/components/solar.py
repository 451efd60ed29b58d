"""
Solar ephemeris component.

Low-order solar position series (mean anomaly, equation of center,
ecliptic longitude) followed by the standard equatorial to horizontal
transform. Accurate to a fraction of a degree over several centuries
around J2000, which is plenty for scene lighting.

All functions accept scalars or NumPy arrays of days since J2000, so a
whole day track can be evaluated in one call (see ``sun_path``).

Reference:
    Strous, "Astronomy Answers: Position of the Sun".
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import TYPE_CHECKING

import numpy as np

from ..constants import (
    DEG2RAD,
    EQUATION_OF_CENTER_DEG,
    MINUTES_PER_DAY,
    OBLIQUITY_DEG,
    PERIHELION_DEG,
    RAD2DEG,
    SIDEREAL_RATE_DEG,
    SIDEREAL_TIME_DEG,
    SOLAR_MEAN_ANOMALY_DEG,
    SOLAR_MEAN_ANOMALY_RATE_DEG,
)
from ..models.celestial import CelestialPosition
from .time_model import days_since_j2000

if TYPE_CHECKING:
    from numpy.typing import ArrayLike, NDArray

    from ..models.location import GeoLocation

OBLIQUITY = DEG2RAD * OBLIQUITY_DEG


# =============================================================================
# Series Terms
# =============================================================================


def solar_mean_anomaly(days: ArrayLike) -> ArrayLike:
    """Solar mean anomaly M in radians."""
    return DEG2RAD * (SOLAR_MEAN_ANOMALY_DEG + SOLAR_MEAN_ANOMALY_RATE_DEG * np.asarray(days))


def ecliptic_longitude(mean_anomaly: ArrayLike) -> ArrayLike:
    """Solar ecliptic longitude L = M + C + perihelion + 180°, radians."""
    m = np.asarray(mean_anomaly)
    c1, c2, c3 = EQUATION_OF_CENTER_DEG
    center = DEG2RAD * (c1 * np.sin(m) + c2 * np.sin(2 * m) + c3 * np.sin(3 * m))
    return m + center + DEG2RAD * PERIHELION_DEG + np.pi


def declination(longitude: ArrayLike, latitude: ArrayLike = 0.0) -> ArrayLike:
    """Declination of an ecliptic (longitude, latitude) position, radians."""
    lon, lat = np.asarray(longitude), np.asarray(latitude)
    return np.arcsin(np.sin(lat) * np.cos(OBLIQUITY) + np.cos(lat) * np.sin(OBLIQUITY) * np.sin(lon))


def right_ascension(longitude: ArrayLike, latitude: ArrayLike = 0.0) -> ArrayLike:
    """Right ascension of an ecliptic (longitude, latitude) position, radians."""
    lon, lat = np.asarray(longitude), np.asarray(latitude)
    return np.arctan2(np.sin(lon) * np.cos(OBLIQUITY) - np.tan(lat) * np.sin(OBLIQUITY), np.cos(lon))


def sidereal_time(days: ArrayLike, longitude_west: float) -> ArrayLike:
    """Local sidereal time in radians; longitude_west is -longitude in radians."""
    return DEG2RAD * (SIDEREAL_TIME_DEG + SIDEREAL_RATE_DEG * np.asarray(days)) - longitude_west


def horizon_azimuth(hour_angle: ArrayLike, latitude: float, decl: ArrayLike) -> ArrayLike:
    """Azimuth from south, clockwise seen from above (positive toward west), radians."""
    h, d = np.asarray(hour_angle), np.asarray(decl)
    return np.arctan2(np.sin(h), np.cos(h) * np.sin(latitude) - np.tan(d) * np.cos(latitude))


def horizon_altitude(hour_angle: ArrayLike, latitude: float, decl: ArrayLike) -> ArrayLike:
    """Altitude above the horizon, radians."""
    h, d = np.asarray(hour_angle), np.asarray(decl)
    return np.arcsin(np.sin(latitude) * np.sin(d) + np.cos(latitude) * np.cos(d) * np.cos(h))


# =============================================================================
# Sun Position
# =============================================================================


@dataclass(frozen=True)
class SolarTerms:
    """
    Intermediate and final solar quantities for one evaluation.

    The lunar ephemeris reuses ``mean_anomaly`` and ``ecliptic_longitude``
    for its perturbation terms and phase, so they are kept alongside the
    horizon coordinates.
    """

    days: ArrayLike
    mean_anomaly: ArrayLike
    ecliptic_longitude: ArrayLike
    declination: ArrayLike
    right_ascension: ArrayLike
    hour_angle: ArrayLike
    azimuth: ArrayLike
    altitude: ArrayLike


def solar_terms(days: ArrayLike, latitude_deg: float, longitude_deg: float) -> SolarTerms:
    """
    Evaluate the solar series for days since J2000 at a location.

    No polar special-casing: during polar day or night the altitude simply
    stays positive or negative all day.

    Args:
        days: Days since J2000 (scalar or array).
        latitude_deg: Observer latitude in degrees.
        longitude_deg: Observer longitude in degrees (east positive).

    Returns:
        SolarTerms with angles in radians.
    """
    phi = DEG2RAD * latitude_deg
    lw = -DEG2RAD * longitude_deg

    m = solar_mean_anomaly(days)
    lon = ecliptic_longitude(m)
    dec = declination(lon)
    ra = right_ascension(lon)
    h = sidereal_time(days, lw) - ra

    return SolarTerms(
        days=days,
        mean_anomaly=m,
        ecliptic_longitude=lon,
        declination=dec,
        right_ascension=ra,
        hour_angle=h,
        azimuth=horizon_azimuth(h, phi, dec),
        altitude=horizon_altitude(h, phi, dec),
    )


def sun_position(instant: datetime, location: GeoLocation) -> CelestialPosition:
    """
    Sun azimuth/altitude for an instant and location.

    Args:
        instant: Datetime (naive values are taken as UTC).
        location: Observer location.

    Returns:
        CelestialPosition in radians (azimuth from south, clockwise).

    Example:
        >>> pos = sun_position(datetime(2023, 6, 21, 12, tzinfo=timezone.utc), GeoLocation(51.5, 0.0))
        >>> round(pos.altitude_deg)
        62
    """
    terms = solar_terms(days_since_j2000(instant), location.latitude, location.longitude)
    return CelestialPosition(azimuth=float(terms.azimuth), altitude=float(terms.altitude))


# =============================================================================
# Day Track
# =============================================================================


@dataclass(frozen=True)
class SunPath:
    """
    Sun track sampled over one local day.

    Attributes:
        hours: Local clock hours of each sample, shape (n,).
        azimuth: Azimuth per sample, radians.
        altitude: Altitude per sample, radians.
    """

    hours: NDArray[np.floating]
    azimuth: NDArray[np.floating]
    altitude: NDArray[np.floating]

    @property
    def max_altitude(self) -> float:
        return float(np.max(self.altitude))

    @property
    def max_altitude_deg(self) -> float:
        return self.max_altitude * RAD2DEG

    @property
    def daylight_hours(self) -> float:
        """Approximate hours with the sun above the horizon (sample count × step)."""
        if len(self.hours) < 2:
            return 0.0
        step = float(self.hours[1] - self.hours[0])
        return float(np.count_nonzero(self.altitude > 0)) * step


def sun_path(
    location: GeoLocation,
    day: date,
    step_minutes: float = 15.0,
    timezone_offset_minutes: float = 0.0,
) -> SunPath:
    """
    Sample the sun track across one local day.

    Args:
        location: Observer location.
        day: Local calendar date.
        step_minutes: Sampling interval. Default 15 minutes (96 samples).
        timezone_offset_minutes: Local time minus UTC.

    Returns:
        SunPath with one sample per step starting at local midnight.
    """
    minutes = np.arange(0.0, MINUTES_PER_DAY, step_minutes)
    midnight_utc = datetime(day.year, day.month, day.day, tzinfo=timezone.utc) - timedelta(
        minutes=timezone_offset_minutes
    )
    days = days_since_j2000(midnight_utc) + minutes / MINUTES_PER_DAY

    terms = solar_terms(days, location.latitude, location.longitude)
    return SunPath(
        hours=minutes / 60.0,
        azimuth=np.asarray(terms.azimuth, dtype=np.float64),
        altitude=np.asarray(terms.altitude, dtype=np.float64),
    )


def max_solar_altitude(
    location: GeoLocation, day: date, timezone_offset_minutes: float = 0.0
) -> float:
    """Highest sun altitude (radians) over a local day at 15-minute resolution."""
    return sun_path(location, day, timezone_offset_minutes=timezone_offset_minutes).max_altitude
