"""
Lunar ephemeris component.

Mean lunar elements with the three largest periodic terms (evection,
variation, annual equation), converted to horizon coordinates with the
same transform as the sun. Phase and illumination come from the
elongation between the lunar and solar ecliptic longitudes.

Precision is a degree or two in position, which is enough for placing a
moonlight and naming the phase.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

import numpy as np

from ..constants import (
    ANNUAL_EQUATION_DEG,
    DEG2RAD,
    EVECTION_DEG,
    LUNAR_ASCENDING_NODE_DEG,
    LUNAR_ASCENDING_NODE_RATE_DEG,
    LUNAR_INCLINATION_DEG,
    LUNAR_MEAN_ANOMALY_DEG,
    LUNAR_MEAN_ANOMALY_RATE_DEG,
    LUNAR_MEAN_LONGITUDE_DEG,
    LUNAR_MEAN_LONGITUDE_RATE_DEG,
    VARIATION_DEG,
)
from ..models.celestial import LunarPosition
from .solar import (
    SolarTerms,
    declination,
    horizon_altitude,
    horizon_azimuth,
    right_ascension,
    sidereal_time,
    solar_terms,
)
from .time_model import days_since_j2000

if TYPE_CHECKING:
    from numpy.typing import ArrayLike

    from ..models.location import GeoLocation


def lunar_mean_anomaly(days: ArrayLike) -> ArrayLike:
    return DEG2RAD * (LUNAR_MEAN_ANOMALY_DEG + LUNAR_MEAN_ANOMALY_RATE_DEG * np.asarray(days))


def lunar_mean_longitude(days: ArrayLike) -> ArrayLike:
    return DEG2RAD * (LUNAR_MEAN_LONGITUDE_DEG + LUNAR_MEAN_LONGITUDE_RATE_DEG * np.asarray(days))


def lunar_ascending_node(days: ArrayLike) -> ArrayLike:
    return DEG2RAD * (LUNAR_ASCENDING_NODE_DEG + LUNAR_ASCENDING_NODE_RATE_DEG * np.asarray(days))


def lunar_ecliptic_longitude(
    mean_longitude: ArrayLike,
    mean_anomaly: ArrayLike,
    solar_longitude: ArrayLike,
    solar_mean_anomaly: ArrayLike,
) -> ArrayLike:
    """
    Lunar ecliptic longitude with evection, variation and annual equation.

    Args:
        mean_longitude: Lunar mean longitude, radians.
        mean_anomaly: Lunar mean anomaly, radians.
        solar_longitude: Solar ecliptic longitude, radians.
        solar_mean_anomaly: Solar mean anomaly, radians.
    """
    twice_elongation = 2 * np.asarray(mean_longitude) - 2 * np.asarray(solar_longitude)
    evection = DEG2RAD * EVECTION_DEG * np.sin(twice_elongation - mean_anomaly)
    variation = DEG2RAD * VARIATION_DEG * np.sin(twice_elongation)
    annual_equation = DEG2RAD * ANNUAL_EQUATION_DEG * np.sin(solar_mean_anomaly)
    return mean_longitude + evection + variation + annual_equation


def lunar_ecliptic_latitude(longitude: ArrayLike, ascending_node: ArrayLike) -> ArrayLike:
    return DEG2RAD * LUNAR_INCLINATION_DEG * np.sin(np.asarray(longitude) - ascending_node)


def elongation(lunar_longitude: ArrayLike, solar_longitude: ArrayLike) -> ArrayLike:
    """Moon minus sun ecliptic longitude wrapped to (-pi, pi]; 0 at new moon."""
    diff = np.asarray(lunar_longitude) - solar_longitude
    return np.arctan2(np.sin(diff), np.cos(diff))


def phase_angle(elong: ArrayLike) -> ArrayLike:
    """Phase angle wrapped to (-pi, pi]: 0 at full moon, +-pi at new moon."""
    angle = np.pi - np.asarray(elong)
    return np.arctan2(np.sin(angle), np.cos(angle))


def illumination_fraction(phase: ArrayLike) -> ArrayLike:
    """Lit fraction of the disk: (1 + cos(phase)) / 2, 0 at new moon, 1 at full moon."""
    return (1 + np.cos(phase)) / 2


@dataclass(frozen=True)
class LunarTerms:
    """Intermediate and final lunar quantities for one evaluation (radians)."""

    ecliptic_longitude: ArrayLike
    ecliptic_latitude: ArrayLike
    declination: ArrayLike
    right_ascension: ArrayLike
    hour_angle: ArrayLike
    azimuth: ArrayLike
    altitude: ArrayLike
    elongation: ArrayLike
    phase_angle: ArrayLike
    illumination: ArrayLike


def lunar_terms(sun: SolarTerms, latitude_deg: float, longitude_deg: float) -> LunarTerms:
    """
    Evaluate the lunar series at the same instant(s) as a solar evaluation.

    Args:
        sun: Solar terms for the same days since J2000 (supplies the solar
            mean anomaly and ecliptic longitude).
        latitude_deg: Observer latitude in degrees.
        longitude_deg: Observer longitude in degrees (east positive).
    """
    days = sun.days
    phi = DEG2RAD * latitude_deg
    lw = -DEG2RAD * longitude_deg

    mean_anom = lunar_mean_anomaly(days)
    mean_long = lunar_mean_longitude(days)
    node = lunar_ascending_node(days)

    lon = lunar_ecliptic_longitude(mean_long, mean_anom, sun.ecliptic_longitude, sun.mean_anomaly)
    lat = lunar_ecliptic_latitude(lon, node)

    dec = declination(lon, lat)
    ra = right_ascension(lon, lat)
    h = sidereal_time(days, lw) - ra

    elong = elongation(lon, sun.ecliptic_longitude)
    phase = phase_angle(elong)

    return LunarTerms(
        ecliptic_longitude=lon,
        ecliptic_latitude=lat,
        declination=dec,
        right_ascension=ra,
        hour_angle=h,
        azimuth=horizon_azimuth(h, phi, dec),
        altitude=horizon_altitude(h, phi, dec),
        elongation=elong,
        phase_angle=phase,
        illumination=illumination_fraction(phase),
    )


def moon_position(instant: datetime | None, location: GeoLocation, sun: SolarTerms | None = None) -> LunarPosition:
    """
    Moon azimuth/altitude, phase angle and illumination for an instant.

    Args:
        instant: Datetime (naive values are taken as UTC). Only read when
            ``sun`` is not supplied.
        location: Observer location.
        sun: Solar terms already evaluated for this instant and location.
            Computed here when not supplied.

    Returns:
        LunarPosition in radians.
    """
    if sun is None:
        sun = solar_terms(days_since_j2000(instant), location.latitude, location.longitude)
    terms = lunar_terms(sun, location.latitude, location.longitude)
    return LunarPosition(
        azimuth=float(terms.azimuth),
        altitude=float(terms.altitude),
        phase_angle=float(terms.phase_angle),
        illumination=float(terms.illumination),
        elongation=float(terms.elongation),
    )
