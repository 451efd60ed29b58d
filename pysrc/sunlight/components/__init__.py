"""
Computation components for the lighting pipeline.

Each component is a set of pure functions (the time model also owns its
TimeState) with no dependency on any scene-graph type:

- time_model: instant resolution and J2000 day counts
- solar: sun position series and day-track sampling
- lunar: moon position, phase angle and illumination
- weather: preset tables blended with the twilight fade
- projection: placement vectors and LightingState assembly
"""

from .lunar import moon_position
from .projection import compute_state, placement_vector, project_state
from .solar import SunPath, max_solar_altitude, sun_path, sun_position
from .time_model import TimeModel, days_since_j2000
from .weather import blend_weather

__all__ = [
    "TimeModel",
    "days_since_j2000",
    "sun_position",
    "sun_path",
    "max_solar_altitude",
    "SunPath",
    "moon_position",
    "blend_weather",
    "placement_vector",
    "project_state",
    "compute_state",
]
