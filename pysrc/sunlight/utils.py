"""Utility functions for range normalization and namespace conversion."""

from __future__ import annotations

import math
from types import SimpleNamespace
from typing import Any

# =============================================================================
# Range Normalization
# =============================================================================
# None of these raise. NaN passes through unchanged so that invalid input
# surfaces as NaN in the published state instead of an exception.
# =============================================================================


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp value to [lower, upper]."""
    return min(max(value, lower), upper)


def normalize_longitude(longitude: float) -> float:
    """
    Wrap a longitude into (-180, 180].

    Args:
        longitude: Longitude in degrees (east positive), any range.

    Returns:
        Equivalent longitude in (-180, 180].
    """
    normalized = (longitude + 180.0) % 360.0 - 180.0
    if normalized == -180.0:
        return 180.0
    return normalized


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


def limit_day_of_year(day: float, year: int) -> int | float:
    """
    Floor a day-of-year and clamp it to [1, days_in_year(year)].

    Args:
        day: Day of year (1-based). Fractions are dropped.
        year: Reference year used for the leap-year check.

    Returns:
        Integer day of year, or NaN if day is NaN.
    """
    if math.isnan(day):
        return day
    if math.isinf(day):
        return 1 if day < 0 else days_in_year(year)
    return int(clamp(math.floor(day), 1, days_in_year(year)))


def normalize_hours(hours: float) -> float:
    """Wrap an hour-of-day into [0, 24)."""
    normalized = hours % 24.0
    # -1e-20 % 24.0 rounds to 24.0
    return 0.0 if normalized >= 24.0 else normalized


def same_value(a: float, b: float) -> bool:
    """Equality for no-op checks; two NaNs count as the same value."""
    return a == b or (math.isnan(a) and math.isnan(b))


def wrap_angle(angle: float) -> float:
    """Wrap an angle in radians into (-pi, pi]."""
    return math.atan2(math.sin(angle), math.cos(angle))


# =============================================================================
# Namespace Conversion (for JSON table loading)
# =============================================================================


def dict_to_namespace(d: dict[str, Any] | list | Any) -> SimpleNamespace | list | Any:
    """
    Recursively convert dicts to SimpleNamespace.

    Args:
        d: Dictionary, list, or scalar value to convert

    Returns:
        SimpleNamespace for dicts, list of converted items for lists, or original value for scalars
    """
    if isinstance(d, dict):
        return SimpleNamespace(**{k: dict_to_namespace(v) for k, v in d.items()})
    elif isinstance(d, list):
        return [dict_to_namespace(i) for i in d]
    else:
        return d

