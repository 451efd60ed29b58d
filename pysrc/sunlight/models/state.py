"""Published lighting-state snapshot."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime as dt
from typing import Any

from ..presets import moon_phase_name
from .celestial import CelestialPosition, LunarPosition
from .color import Color
from .location import GeoLocation
from .weather import WeatherPreset

Vector3 = tuple[float, float, float]


@dataclass(frozen=True)
class LightingState:
    """
    Complete lighting state for one instant.

    Every field is derived from the same instant and location in a single
    recompute. Snapshots are never mutated; the next recompute publishes a
    new one.

    Directions are placement vectors in host axes (+X east, +Y up,
    +Z south) scaled to the configured light distance; lights placed there
    should aim at the origin.

    Attributes:
        instant: UTC instant the state was computed for. None when the
            manual time holds NaN; every angle is NaN then.
        location: Observer location.
        weather: Weather preset in effect.
        use_system_time: Whether the instant came from the wall clock.
        sun: Sun azimuth/altitude.
        sun_direction: Sun placement vector.
        sun_intensity: Directional sun intensity after twilight fade.
        sun_color: Directional sun color.
        sun_visible: Sun above the horizon and brighter than epsilon.
        ambient_intensity: Ambient fill intensity.
        ambient_color: Ambient fill color.
        hemisphere_intensity: Hemisphere light intensity.
        sky_color: Hemisphere sky color.
        ground_color: Hemisphere ground color.
        shadow_bias: Shadow bias for the directional light.
        daylight_factor: Twilight blend weight, 0 (night) to 1 (day).
        moon: Moon position and phase, or None if the moon is disabled.
        moon_direction: Moon placement vector, or None.
        moon_intensity: Directional moonlight intensity.
        moon_color: Moonlight color.
        moon_visible: Moon above the horizon and lit enough to show.
    """

    instant: dt | None
    location: GeoLocation
    weather: WeatherPreset
    use_system_time: bool
    sun: CelestialPosition
    sun_direction: Vector3
    sun_intensity: float
    sun_color: Color
    sun_visible: bool
    ambient_intensity: float
    ambient_color: Color
    hemisphere_intensity: float
    sky_color: Color
    ground_color: Color
    shadow_bias: float
    daylight_factor: float
    moon: LunarPosition | None = None
    moon_direction: Vector3 | None = None
    moon_intensity: float = 0.0
    moon_color: Color | None = None
    moon_visible: bool = False

    @property
    def moon_phase(self) -> float | None:
        """Moon phase angle in radians (0 full, +-pi new), None if disabled."""
        return self.moon.phase_angle if self.moon is not None else None

    @property
    def moon_illumination(self) -> float | None:
        """Lit fraction of the moon's disk, None if disabled."""
        return self.moon.illumination if self.moon is not None else None

    @property
    def moon_phase_name(self) -> str | None:
        return moon_phase_name(self.moon.elongation) if self.moon is not None else None

    def to_dict(self) -> dict[str, Any]:
        """
        JSON-friendly representation (angles in degrees, colors as hex).

        Example:
            >>> json.dumps(engine.get_state().to_dict())
        """
        data: dict[str, Any] = {
            "instant": self.instant.isoformat() if self.instant is not None else None,
            "latitude": self.location.latitude,
            "longitude": self.location.longitude,
            "weather": self.weather.value,
            "use_system_time": self.use_system_time,
            "sun": {
                "azimuth_deg": self.sun.azimuth_deg,
                "altitude_deg": self.sun.altitude_deg,
                "bearing_deg": self.sun.compass_bearing,
                "direction": list(self.sun_direction),
                "intensity": self.sun_intensity,
                "color": self.sun_color.to_hex(),
                "visible": self.sun_visible,
                "shadow_bias": self.shadow_bias,
            },
            "ambient": {"intensity": self.ambient_intensity, "color": self.ambient_color.to_hex()},
            "hemisphere": {
                "intensity": self.hemisphere_intensity,
                "sky_color": self.sky_color.to_hex(),
                "ground_color": self.ground_color.to_hex(),
            },
            "daylight_factor": self.daylight_factor,
            "moon": None,
        }
        if self.moon is not None:
            data["moon"] = {
                "azimuth_deg": self.moon.azimuth_deg,
                "altitude_deg": self.moon.altitude_deg,
                "bearing_deg": self.moon.compass_bearing,
                "direction": list(self.moon_direction) if self.moon_direction is not None else None,
                "phase_angle": self.moon.phase_angle,
                "phase_name": self.moon_phase_name,
                "illumination": self.moon.illumination,
                "intensity": self.moon_intensity,
                "color": self.moon_color.to_hex() if self.moon_color is not None else None,
                "visible": self.moon_visible,
            }
        return data
