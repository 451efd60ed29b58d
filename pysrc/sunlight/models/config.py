"""Engine configuration classes."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from ..constants import (
    DEFAULT_DAY_OF_YEAR,
    DEFAULT_LATITUDE,
    DEFAULT_LIGHT_DISTANCE,
    DEFAULT_LONGITUDE,
    DEFAULT_MIN_MOON_ILLUMINATION,
    DEFAULT_TIME_OF_DAY,
    MOON_COLOR_HEX,
)
from ..errors import ConfigurationError
from ..sunlight_logging import get_logger
from .weather import WeatherPreset

logger = get_logger(__name__)


@dataclass
class HelperOptions:
    """
    Visualization helper toggles forwarded to light sinks.

    The engine never draws helpers itself; a ``LightRig`` passes these
    flags to sinks that implement ``set_helper_visible``.

    Attributes:
        show_sun_helper: Show a helper gizmo for the sun light. Default False.
        sun_helper_size: Helper size in scene units. Default 25.
        sun_helper_color: Helper color as 0xRRGGBB. Default 0xFFD27F.
        show_moon_helper: Show a helper gizmo for the moon light. Default False.
            The moon helper is additionally hidden whenever the moon is not visible.
        moon_helper_size: Helper size in scene units. Default 20.
        moon_helper_color: Helper color as 0xRRGGBB. Default 0xB8C5D6.
    """

    show_sun_helper: bool = False
    sun_helper_size: float = 25.0
    sun_helper_color: int = 0xFFD27F
    show_moon_helper: bool = False
    moon_helper_size: float = 20.0
    moon_helper_color: int = MOON_COLOR_HEX


@dataclass
class SunlightConfig:
    """
    Configuration for a SunLightEngine.

    Groups every recognised option in one typed object. Location and time
    values are clamped/normalized by the engine, not rejected here; only
    values with no sensible coercion raise ``ConfigurationError``.

    Attributes:
        latitude: Initial latitude in degrees. Default 51.5072 (London).
        longitude: Initial longitude in degrees. Default -0.1276.
        day_of_year: Initial day of year (1-based). Default 172.
        time_of_day: Initial local clock hours. Default 12.0.
        timezone_offset_minutes: Local time minus UTC. Default 0.
        reference_year: Year the day of year refers to. None uses the
            current UTC year.
        use_system_time: Drive the instant from the wall clock. Default False.
        weather: Weather preset name or WeatherPreset. Default "sunny".
        light_distance: Distance used to turn azimuth/altitude into a
            placement vector. Default 150.
        enable_moon: Compute moon position, phase and moonlight. Default True.
        min_moon_illumination: Lit fraction below which the moon is
            reported invisible. Default 0.1.
        helpers: Helper visualization toggles.
        presets_path: Optional custom weather preset table (JSON). None
            uses the bundled table.

    Examples:
        >>> config = SunlightConfig(latitude=35.68, longitude=139.65, timezone_offset_minutes=540)
        >>> config.save("tokyo.json")
        >>> SunlightConfig.from_json("tokyo.json").latitude
        35.68
    """

    latitude: float = DEFAULT_LATITUDE
    longitude: float = DEFAULT_LONGITUDE
    day_of_year: float = DEFAULT_DAY_OF_YEAR
    time_of_day: float = DEFAULT_TIME_OF_DAY
    timezone_offset_minutes: float = 0.0
    reference_year: int | None = None
    use_system_time: bool = False
    weather: WeatherPreset | str = WeatherPreset.SUNNY
    light_distance: float = DEFAULT_LIGHT_DISTANCE
    enable_moon: bool = True
    min_moon_illumination: float = DEFAULT_MIN_MOON_ILLUMINATION
    helpers: HelperOptions = field(default_factory=HelperOptions)
    presets_path: str | Path | None = None

    def __post_init__(self):
        self.weather = WeatherPreset.parse(self.weather)
        if isinstance(self.helpers, dict):
            self.helpers = HelperOptions(**self.helpers)
        if not self.light_distance > 0:
            raise ConfigurationError("light_distance", f"must be > 0, got {self.light_distance}")
        if not 0 <= self.min_moon_illumination <= 1:
            raise ConfigurationError(
                "min_moon_illumination", f"must be in [0, 1], got {self.min_moon_illumination}"
            )

    @classmethod
    def defaults(cls) -> SunlightConfig:
        """Configuration with every option at its default (London, June solstice noon)."""
        return cls()

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        data = asdict(self)
        data["weather"] = WeatherPreset.parse(self.weather).value
        data["presets_path"] = str(self.presets_path) if self.presets_path is not None else None
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SunlightConfig:
        """
        Build a configuration from a dict, ignoring unknown keys.

        Unknown keys are logged so that typos in hand-written files are noticed.
        """
        known = set(cls.__dataclass_fields__)
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning(f"Ignoring unknown configuration keys: {', '.join(unknown)}")
        return cls(**{k: v for k, v in data.items() if k in known})

    def save(self, path: str | Path) -> None:
        """
        Save configuration to JSON file.

        Args:
            path: Output path for JSON file
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

        logger.info(f"Saved configuration to {path}")

    @classmethod
    def from_json(cls, path: str | Path) -> SunlightConfig:
        """
        Load configuration from JSON file.

        Args:
            path: Path to JSON configuration file

        Returns:
            SunlightConfig loaded from file

        Raises:
            FileNotFoundError: If the file does not exist.
            ConfigurationError: If a value is invalid.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        with open(path) as f:
            data = json.load(f)

        return cls.from_dict(data)
