"""Time state owned by the time model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TimeState:
    """
    Manual time parameters plus the system-clock switch.

    When ``use_system_time`` is set, the manual fields are overwritten
    from the wall clock on every resolution and only reflect the last
    resolved instant.

    Attributes:
        reference_year: Calendar year the day of year refers to.
        day_of_year: Day of year, 1-based, within the reference year. A whole
            number, except that NaN input is stored as NaN.
        time_of_day: Local clock hours in [0, 24).
        timezone_offset_minutes: Local time minus UTC, in minutes.
        use_system_time: Derive the instant from the wall clock.
    """

    reference_year: int
    day_of_year: int | float
    time_of_day: float
    timezone_offset_minutes: float = 0.0
    use_system_time: bool = False
