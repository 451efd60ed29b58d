"""
Lighting-state projection component.

Turns horizon coordinates into placement vectors in host axes and packs
sun, moon and photometry into one LightingState.

Host axes: +X east, +Y up, +Z south (-Z north). With azimuth measured
from south and positive toward west:

    x = -r cos(alt) sin(az)     west (az = +90°) -> -X
    y =  r sin(alt)
    z =  r cos(alt) cos(az)     south (az = 0°)  -> +Z

so a sun rising in the east has x > 0.
"""

from __future__ import annotations

import math
from datetime import datetime
from typing import TYPE_CHECKING

from ..constants import BASE_MOON_INTENSITY, MOON_COLOR_HEX, SUN_VISIBILITY_EPSILON
from ..models.celestial import CelestialPosition, LunarPosition
from ..models.color import Color
from ..models.location import GeoLocation
from ..models.state import LightingState, Vector3
from ..models.weather import Photometry, WeatherPreset
from .lunar import moon_position
from .solar import solar_terms
from .time_model import as_utc, days_since_j2000
from .weather import blend_weather

if TYPE_CHECKING:
    from types import SimpleNamespace

MOON_COLOR = Color.from_hex(MOON_COLOR_HEX)


def placement_vector(position: CelestialPosition, distance: float) -> Vector3:
    """Position a light `distance` units from the origin along the body's direction."""
    horizontal = distance * math.cos(position.altitude)
    return (
        -horizontal * math.sin(position.azimuth),
        distance * math.sin(position.altitude),
        horizontal * math.cos(position.azimuth),
    )


def moon_intensity(moon: LunarPosition, moon_factor: float) -> float:
    """Moonlight: base × illumination × weather factor × max(0, sin(altitude))."""
    return BASE_MOON_INTENSITY * moon.illumination * moon_factor * max(0.0, math.sin(moon.altitude))


def is_moon_visible(moon: LunarPosition, min_illumination: float) -> bool:
    return moon.altitude > 0 and moon.illumination >= min_illumination


def is_sun_visible(sun: CelestialPosition, intensity: float) -> bool:
    return sun.altitude > 0 and intensity > SUN_VISIBILITY_EPSILON


def project_state(
    instant: datetime | None,
    location: GeoLocation,
    weather: WeatherPreset,
    sun: CelestialPosition,
    photometry: Photometry,
    moon: LunarPosition | None = None,
    light_distance: float = 150.0,
    min_moon_illumination: float = 0.1,
    use_system_time: bool = False,
) -> LightingState:
    """
    Assemble a LightingState from one recompute's derived values.

    Args:
        instant: UTC instant of the recompute, None for a NaN manual time.
        location: Observer location.
        weather: Weather preset the photometry was blended for.
        sun: Sun position.
        photometry: Blended weather/twilight values.
        moon: Moon position and phase, or None when the moon is disabled.
        light_distance: Length of the placement vectors.
        min_moon_illumination: Lit fraction below which the moon is hidden.
        use_system_time: Recorded on the snapshot.
    """
    moon_fields = {}
    if moon is not None:
        moon_fields = {
            "moon": moon,
            "moon_direction": placement_vector(moon, light_distance),
            "moon_intensity": moon_intensity(moon, photometry.moon_factor),
            "moon_color": MOON_COLOR,
            "moon_visible": is_moon_visible(moon, min_moon_illumination),
        }

    return LightingState(
        instant=instant,
        location=location,
        weather=weather,
        use_system_time=use_system_time,
        sun=sun,
        sun_direction=placement_vector(sun, light_distance),
        sun_intensity=photometry.sun_intensity,
        sun_color=photometry.sun_color,
        sun_visible=is_sun_visible(sun, photometry.sun_intensity),
        ambient_intensity=photometry.ambient_intensity,
        ambient_color=photometry.ambient_color,
        hemisphere_intensity=photometry.hemisphere_intensity,
        sky_color=photometry.sky_color,
        ground_color=photometry.ground_color,
        shadow_bias=photometry.shadow_bias,
        daylight_factor=photometry.daylight_factor,
        **moon_fields,
    )


def compute_state(
    instant: datetime | None,
    location: GeoLocation,
    weather: WeatherPreset,
    enable_moon: bool = True,
    light_distance: float = 150.0,
    min_moon_illumination: float = 0.1,
    use_system_time: bool = False,
    tables: SimpleNamespace | None = None,
    days: float | None = None,
) -> LightingState:
    """
    Run one full pass: sun, moon, weather blend, then projection.

    The solar series is evaluated once and reused by the lunar series, so
    sun and moon always refer to exactly the same instant.

    Args:
        instant: Instant to evaluate (naive values are taken as UTC). None
            evaluates ``days`` instead.
        location: Observer location.
        weather: Weather preset.
        enable_moon: Compute the moon. When False the moon fields are None.
        light_distance: Length of the placement vectors.
        min_moon_illumination: Lit fraction below which the moon is hidden.
        use_system_time: Recorded on the snapshot.
        tables: Preset tables from ``config.load_presets``. None uses the
            bundled tables.
        days: Days since J2000, used when ``instant`` is None. May be NaN,
            which propagates into every angle and intensity.

    Returns:
        Frozen LightingState.
    """
    if instant is not None:
        instant = as_utc(instant)
        days = days_since_j2000(instant)
    elif days is None:
        raise ValueError("compute_state needs an instant or days since J2000")
    weather = WeatherPreset.parse(weather)
    terms = solar_terms(days, location.latitude, location.longitude)
    sun = CelestialPosition(azimuth=float(terms.azimuth), altitude=float(terms.altitude))
    moon = moon_position(instant, location, sun=terms) if enable_moon else None
    photometry = blend_weather(weather, sun.altitude, tables)

    return project_state(
        instant,
        location,
        photometry=photometry,
        weather=weather,
        sun=sun,
        moon=moon,
        light_distance=light_distance,
        min_moon_illumination=min_moon_illumination,
        use_system_time=use_system_time,
    )
