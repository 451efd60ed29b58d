"""Weather preset and blended photometry models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..errors import ConfigurationError
from .color import Color


class WeatherPreset(str, Enum):
    """Closed set of weather categories, each selecting a photometric table."""

    SUNNY = "sunny"
    PARTLY_CLOUDY = "partly-cloudy"
    OVERCAST = "overcast"

    @classmethod
    def parse(cls, value: WeatherPreset | str) -> WeatherPreset:
        """
        Coerce a preset or its name into a WeatherPreset.

        Underscores are accepted in place of hyphens ("partly_cloudy").

        Raises:
            ConfigurationError: If the name is not a known preset.
        """
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower().replace("_", "-")
        try:
            return cls(name)
        except ValueError:
            options = ", ".join(p.value for p in cls)
            raise ConfigurationError("weather", f"unknown preset {value!r} (expected one of: {options})") from None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Photometry:
    """
    Weather preset blended with the twilight fade for one solar altitude.

    Attributes:
        sun_intensity: Directional sun intensity (0 below twilight start).
        sun_color: Directional sun color.
        ambient_intensity: Ambient fill intensity (never below 0.05).
        ambient_color: Ambient fill color.
        hemisphere_intensity: Sky/ground hemisphere intensity (never below 0.05).
        sky_color: Hemisphere sky color.
        ground_color: Hemisphere ground color.
        shadow_bias: Shadow bias suggested by the preset.
        moon_factor: Moonlight attenuation for this weather.
        daylight_factor: 0 at/below -6° solar altitude, 1 at/above 4°.
    """

    sun_intensity: float
    sun_color: Color
    ambient_intensity: float
    ambient_color: Color
    hemisphere_intensity: float
    sky_color: Color
    ground_color: Color
    shadow_bias: float
    moon_factor: float
    daylight_factor: float

    @property
    def twilight_factor(self) -> float:
        return 1.0 - self.daylight_factor
