"""Data models for the sunlight engine.

Modules
-------
location
    ``GeoLocation``: clamped/normalized observer coordinates.
time
    ``TimeState``: manual time parameters and the system-clock switch.
celestial
    ``CelestialPosition`` and ``LunarPosition``: horizon-frame directions.
color
    ``Color``: RGB values used by preset tables and snapshots.
weather
    ``WeatherPreset`` and ``Photometry``: weather categories and the
    blended intensities/colors.
state
    ``LightingState``: the published snapshot.
config
    ``SunlightConfig`` and ``HelperOptions``: engine options.
"""

from .celestial import CelestialPosition, LunarPosition
from .color import Color
from .config import HelperOptions, SunlightConfig
from .location import GeoLocation
from .state import LightingState
from .time import TimeState
from .weather import Photometry, WeatherPreset

__all__ = [
    # Location and time
    "GeoLocation",
    "TimeState",
    # Positions
    "CelestialPosition",
    "LunarPosition",
    # Photometry
    "Color",
    "WeatherPreset",
    "Photometry",
    # Snapshot
    "LightingState",
    # Configuration
    "SunlightConfig",
    "HelperOptions",
]
