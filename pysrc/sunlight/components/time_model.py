"""
Time model component.

Resolves the instant every recompute is evaluated at, either from the wall
clock or from manual (year, day of year, time of day, UTC offset) values,
and converts instants to days since J2000 for the ephemerides.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from ..constants import (
    J2000_JD,
    MAX_TIMEZONE_OFFSET_MINUTES,
    MIN_TIMEZONE_OFFSET_MINUTES,
    MINUTES_PER_DAY,
    SECONDS_PER_DAY,
)
from ..models.time import TimeState
from ..utils import clamp, limit_day_of_year, normalize_hours, same_value

Clock = Callable[[], datetime]

J2000 = datetime(2000, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def system_clock() -> datetime:
    """Current wall-clock time in UTC."""
    return datetime.now(timezone.utc)


def as_utc(dt: datetime) -> datetime:
    """Attach UTC to naive datetimes and convert aware ones to UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def days_since_j2000(dt: datetime) -> float:
    """Fractional days since 2000-01-01T12:00Z (naive datetimes are taken as UTC)."""
    return (as_utc(dt) - J2000).total_seconds() / SECONDS_PER_DAY


def julian_date(dt: datetime) -> float:
    """Julian Date of a datetime."""
    return J2000_JD + days_since_j2000(dt)


def day_of_year_utc(dt: datetime) -> int:
    """1-based day of year of the UTC calendar date."""
    return as_utc(dt).timetuple().tm_yday


def hours_utc(dt: datetime) -> float:
    """UTC hour of day including minutes and seconds."""
    dt = as_utc(dt)
    return dt.hour + dt.minute / 60.0 + (dt.second + dt.microsecond / 1e6) / 3600.0


def manual_days(reference_year: int, day_of_year: float, time_of_day: float, timezone_offset_minutes: float) -> float:
    """
    Days since J2000 for a local day of year and clock time.

    Plain float arithmetic, so a NaN field gives NaN days instead of an
    exception.

    Args:
        reference_year: Calendar year.
        day_of_year: 1-based day within the year.
        time_of_day: Local clock hours.
        timezone_offset_minutes: Local time minus UTC.
    """
    year_start = days_since_j2000(datetime(reference_year, 1, 1, tzinfo=timezone.utc))
    minutes = time_of_day * 60 - timezone_offset_minutes
    return year_start + (day_of_year - 1) + minutes / MINUTES_PER_DAY


def manual_instant(
    reference_year: int, day_of_year: float, time_of_day: float, timezone_offset_minutes: float
) -> datetime | None:
    """
    Build the UTC instant for a local day of year and clock time.

    Args:
        reference_year: Calendar year.
        day_of_year: 1-based day within the year.
        time_of_day: Local clock hours.
        timezone_offset_minutes: Local time minus UTC.

    Returns:
        Timezone-aware UTC datetime, or None when a field is NaN.
    """
    minutes = (day_of_year - 1) * 24 * 60 + time_of_day * 60 - timezone_offset_minutes
    if not math.isfinite(minutes):
        return None
    start = datetime(reference_year, 1, 1, tzinfo=timezone.utc)
    return start + timedelta(minutes=minutes)


class TimeModel:
    """
    Owns the TimeState and resolves it to an instant.

    In system-clock mode every ``resolve()`` overwrites the manual fields
    from the wall clock, so manual mutators have no lasting effect until
    the mode is switched off.

    Mutators return True when the stored value changed; callers use that
    to skip recomputes for no-op updates.

    Example:
        >>> model = TimeModel(TimeState(reference_year=2023, day_of_year=172, time_of_day=12.0))
        >>> model.set_time_of_day(25)
        True
        >>> model.state.time_of_day
        1.0
    """

    def __init__(self, state: TimeState, clock: Clock | None = None):
        self.state = state
        self._clock = clock or system_clock
        self.state.day_of_year = limit_day_of_year(state.day_of_year, state.reference_year)
        self.state.time_of_day = normalize_hours(state.time_of_day)
        self.state.timezone_offset_minutes = self._limit_offset(state.timezone_offset_minutes)

    @staticmethod
    def _limit_offset(minutes: float) -> float:
        return clamp(minutes, MIN_TIMEZONE_OFFSET_MINUTES, MAX_TIMEZONE_OFFSET_MINUTES)

    def resolve(self, override: datetime | None = None) -> datetime | None:
        """
        Resolve the instant for the next recompute.

        Args:
            override: Explicit instant (e.g. from an external animation
                clock). Used as-is, leaving the stored fields untouched.

        Returns:
            Timezone-aware UTC datetime, or None when a manual field is NaN
            (see ``days``).
        """
        if override is not None:
            return as_utc(override)

        if self.state.use_system_time:
            now = as_utc(self._clock())
            self.state.reference_year = now.year
            self.state.day_of_year = day_of_year_utc(now)
            self.state.time_of_day = hours_utc(now)
            return now

        return manual_instant(
            self.state.reference_year,
            self.state.day_of_year,
            self.state.time_of_day,
            self.state.timezone_offset_minutes,
        )

    def days(self, instant: datetime | None) -> float:
        """Days since J2000 for a resolved instant, falling back to the manual fields when it is None."""
        if instant is not None:
            return days_since_j2000(instant)
        return manual_days(
            self.state.reference_year,
            self.state.day_of_year,
            self.state.time_of_day,
            self.state.timezone_offset_minutes,
        )

    def set_day_of_year(self, day: float) -> bool:
        limited = limit_day_of_year(day, self.state.reference_year)
        if same_value(limited, self.state.day_of_year):
            return False
        self.state.day_of_year = limited
        return True

    def set_time_of_day(self, hours: float) -> bool:
        normalized = normalize_hours(hours)
        if same_value(normalized, self.state.time_of_day):
            return False
        self.state.time_of_day = normalized
        return True

    def set_timezone_offset(self, minutes: float) -> bool:
        limited = self._limit_offset(minutes)
        if same_value(limited, self.state.timezone_offset_minutes):
            return False
        self.state.timezone_offset_minutes = limited
        return True

    def set_use_system_time(self, enabled: bool) -> bool:
        enabled = bool(enabled)
        if enabled == self.state.use_system_time:
            return False
        self.state.use_system_time = enabled
        return True
