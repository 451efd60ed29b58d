"""Geographic location model."""

from __future__ import annotations

from dataclasses import dataclass

from ..utils import clamp, normalize_longitude


@dataclass(frozen=True)
class GeoLocation:
    """
    Observer location for sun and moon position calculations.

    Out-of-range values are not rejected: latitude is clamped to
    [-90, 90] and longitude wrapped into (-180, 180] on construction.
    Instances are immutable; a location change replaces the whole object.

    Attributes:
        latitude: Latitude in degrees (north positive).
        longitude: Longitude in degrees (east positive).

    Example:
        >>> GeoLocation(95.0, 190.0)
        GeoLocation(latitude=90.0, longitude=-170.0)
    """

    latitude: float
    longitude: float

    def __post_init__(self):
        object.__setattr__(self, "latitude", clamp(float(self.latitude), -90.0, 90.0))
        object.__setattr__(self, "longitude", normalize_longitude(float(self.longitude)))

    def with_latitude(self, latitude: float) -> GeoLocation:
        return GeoLocation(latitude, self.longitude)

    def with_longitude(self, longitude: float) -> GeoLocation:
        return GeoLocation(self.latitude, longitude)
