"""
Human-readable formatting of lighting snapshots.

Used by control panels and log output. Bearings are reported clockwise
from north; altitudes in degrees with one decimal.
"""

from __future__ import annotations

import math
from datetime import date, datetime, timedelta, timezone

from .models.state import LightingState
from .utils import clamp, days_in_year


def format_utc_offset(offset_minutes: float) -> str:
    """
    Format a UTC offset as "UTC+9", "UTC-3:30" or "UTC+5:45".

    Example:
        >>> format_utc_offset(-210)
        'UTC-3:30'
    """
    if math.isnan(offset_minutes):
        return "UTC?"
    offset_minutes = int(round(offset_minutes))
    sign = "+" if offset_minutes >= 0 else "-"
    hours, minutes = divmod(abs(offset_minutes), 60)
    if minutes == 0:
        return f"UTC{sign}{hours}"
    return f"UTC{sign}{hours}:{minutes:02d}"


def format_time_of_day(hours: float) -> str:
    """Format clock hours as "HH:MM" (truncated to the minute, clamped to 00:00-24:00)."""
    total_minutes = math.floor(clamp(hours, 0.0, 24.0) * 60)
    return f"{total_minutes // 60:02d}:{total_minutes % 60:02d}"


def format_day_of_year(day: float, year: int) -> str:
    """
    Format a day of year as a short calendar date ("Jun 21").

    Args:
        day: 1-based day of year; rounded and clamped to the year.
        year: Calendar year (leap years shift dates after Feb 28).
    """
    day = int(clamp(round(day), 1, days_in_year(year)))
    d = date(year, 1, 1) + timedelta(days=day - 1)
    return f"{d:%b} {d.day}"


def local_time(instant: datetime, offset_minutes: float) -> datetime:
    """The instant expressed in a fixed-offset local zone."""
    return instant.astimezone(timezone(timedelta(minutes=offset_minutes)))


def summarize_state(state: LightingState, offset_minutes: float = 0.0) -> list[str]:
    """
    Readout lines for a snapshot.

    Args:
        state: Snapshot to describe.
        offset_minutes: UTC offset used for the local time line.

    Returns:
        Lines of "Label: value" text. Moon lines are omitted when the
        snapshot has no moon.

    Example:
        >>> for line in summarize_state(engine.get_state(), engine.get_timezone_offset()):
        ...     print(line)
        Local Time: 12:00 (Jun 21, UTC+1)
        Sun Altitude: 61.4°
        Sun Azimuth: 177.9° from North
        Weather: sunny
        Moon Phase: Waxing Crescent (21% illuminated)
        Moon Altitude: 38.2° (visible)
    """
    if state.instant is None:
        local_line = "Local Time: --:--"
    else:
        local = local_time(state.instant, offset_minutes)
        hours = local.hour + local.minute / 60.0 + local.second / 3600.0
        local_line = (
            f"Local Time: {format_time_of_day(hours)} ({local:%b} {local.day}, {format_utc_offset(offset_minutes)})"
        )
    lines = [
        local_line,
        f"Sun Altitude: {state.sun.altitude_deg:.1f}°",
        f"Sun Azimuth: {state.sun.compass_bearing:.1f}° from North",
        f"Weather: {state.weather.value}",
    ]

    if state.moon is not None:
        lines.append(f"Moon Phase: {state.moon_phase_name} ({state.moon.illumination * 100:.0f}% illuminated)")
        visibility = "visible" if state.moon_visible else ("below horizon" if state.moon.altitude <= 0 else "too dim")
        lines.append(f"Moon Altitude: {state.moon.altitude_deg:.1f}° ({visibility})")

    return lines
