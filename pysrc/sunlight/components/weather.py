"""
Weather preset blending component.

Handles:
- Preset photometric tables scaled by solar altitude
- Twilight fade of every color toward a fixed low-light palette
- Sun intensity fade-out between +4° and -6° solar altitude
- Ambient and hemisphere floors so scenes never go fully black

Returns a Photometry with all blended values.
"""

from __future__ import annotations

import math
from types import SimpleNamespace

from ..config import cached_presets
from ..constants import (
    ALTITUDE_FACTOR_OFFSET,
    AMBIENT_DAY_GAIN,
    AMBIENT_NIGHT_FRACTION,
    DAYLIGHT_DEG,
    HEMISPHERE_DAY_GAIN,
    HEMISPHERE_NIGHT_FRACTION,
    MIN_FILL_INTENSITY,
    RAD2DEG,
    TWILIGHT_START_DEG,
)
from ..models.color import Color
from ..models.weather import Photometry, WeatherPreset
from ..utils import clamp


def altitude_factor(solar_altitude: float) -> float:
    """Preset intensity scale: clamp(sin(altitude) + 0.1, 0, 1)."""
    return clamp(math.sin(solar_altitude) + ALTITUDE_FACTOR_OFFSET, 0.0, 1.0)


def daylight_factor(solar_altitude: float) -> float:
    """
    Twilight blend weight from solar altitude.

    0 at or below -6° (civil twilight), 1 at or above +4°, linear between.
    """
    altitude_deg = solar_altitude * RAD2DEG
    return clamp((altitude_deg - TWILIGHT_START_DEG) / (DAYLIGHT_DEG - TWILIGHT_START_DEG), 0.0, 1.0)


def _intensity(entry: SimpleNamespace, factor: float) -> float:
    return entry.base + entry.slope * factor


def blend_weather(
    weather: WeatherPreset | str,
    solar_altitude: float,
    tables: SimpleNamespace | None = None,
) -> Photometry:
    """
    Blend a weather preset with the twilight fade for a solar altitude.

    Independent of the weather, every preset color is interpolated toward
    the twilight palette by ``1 - daylight``. Sun intensity is multiplied by
    ``daylight``; ambient and hemisphere intensities keep a night fraction
    (30% and 35%) and are floored at 0.05.

    Args:
        weather: Weather preset (or its name).
        solar_altitude: Sun altitude in radians.
        tables: Preset tables from ``config.load_presets``. None uses the
            bundled tables.

    Returns:
        Photometry for this weather and altitude.

    Example:
        >>> sunny = blend_weather("sunny", math.radians(30))
        >>> overcast = blend_weather("overcast", math.radians(30))
        >>> sunny.sun_intensity > overcast.sun_intensity
        True
    """
    weather = WeatherPreset.parse(weather)
    if tables is None:
        tables = cached_presets()
    preset = tables.presets[weather.value]
    twilight = tables.twilight

    af = altitude_factor(solar_altitude)
    daylight = daylight_factor(solar_altitude)
    fade = 1.0 - daylight

    sun_color = Color.from_hex(preset.sun_color).lerp(Color.from_hex(twilight.sun_color), fade)
    ambient_color = Color.from_hex(preset.ambient_color).lerp(Color.from_hex(twilight.ambient_color), fade)
    sky_color = Color.from_hex(preset.hemisphere_sky_color).lerp(Color.from_hex(twilight.sky_color), fade)
    ground_color = Color.from_hex(preset.hemisphere_ground_color).lerp(Color.from_hex(twilight.ground_color), fade)

    sun_intensity = _intensity(preset.sun_intensity, af) * daylight
    ambient_intensity = max(
        MIN_FILL_INTENSITY,
        _intensity(preset.ambient_intensity, af) * (AMBIENT_NIGHT_FRACTION + AMBIENT_DAY_GAIN * daylight),
    )
    hemisphere_intensity = max(
        MIN_FILL_INTENSITY,
        _intensity(preset.hemisphere_intensity, af) * (HEMISPHERE_NIGHT_FRACTION + HEMISPHERE_DAY_GAIN * daylight),
    )

    return Photometry(
        sun_intensity=sun_intensity,
        sun_color=sun_color,
        ambient_intensity=ambient_intensity,
        ambient_color=ambient_color,
        hemisphere_intensity=hemisphere_intensity,
        sky_color=sky_color,
        ground_color=ground_color,
        shadow_bias=preset.shadow_bias,
        moon_factor=preset.moon_factor,
        daylight_factor=daylight,
    )
