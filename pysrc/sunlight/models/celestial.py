"""Sun and moon positions in the local horizon frame."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..constants import RAD2DEG


@dataclass(frozen=True)
class CelestialPosition:
    """
    Apparent direction of a body in the local horizon frame.

    Attributes:
        azimuth: Radians, measured from local south, increasing clockwise
            seen from above (south=0, west=pi/2, north=pi, east=-pi/2).
        altitude: Radians above the horizon plane (negative below).
    """

    azimuth: float
    altitude: float

    @property
    def azimuth_deg(self) -> float:
        return self.azimuth * RAD2DEG

    @property
    def altitude_deg(self) -> float:
        return self.altitude * RAD2DEG

    @property
    def compass_bearing(self) -> float:
        """Bearing in degrees clockwise from north, in [0, 360)."""
        return (self.azimuth_deg + 180.0) % 360.0

    @property
    def is_above_horizon(self) -> bool:
        return self.altitude > 0


@dataclass(frozen=True)
class LunarPosition(CelestialPosition):
    """
    Moon position plus phase information.

    Attributes:
        phase_angle: Radians in (-pi, pi]; 0 at full moon, +-pi at new moon.
        illumination: Lit fraction of the disk, 0 (new) to 1 (full).
        elongation: Ecliptic longitude of the moon minus that of the sun,
            radians in (-pi, pi]; 0 at new moon, positive while waxing.
    """

    phase_angle: float
    illumination: float
    elongation: float

    @property
    def is_waxing(self) -> bool:
        return 0 < self.elongation < math.pi
