"""Shared pytest configuration and helpers."""

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Make `import sunlight` work from a source checkout without installing.
_pysrc = str(Path(__file__).resolve().parent.parent / "pysrc")
if _pysrc not in sys.path:
    sys.path.insert(0, _pysrc)


class FixedClock:
    """Wall clock that only moves when told to."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


class RecordingSink:
    """Light sink that records every call it receives."""

    def __init__(self):
        self.calls: list[tuple[str, object]] = []
        self.direction = None
        self.intensity = None
        self.color = None
        self.visible = None

    def set_direction(self, direction):
        self.direction = direction
        self.calls.append(("direction", direction))

    def set_intensity(self, intensity):
        self.intensity = intensity
        self.calls.append(("intensity", intensity))

    def set_color(self, color):
        self.color = color
        self.calls.append(("color", color))

    def set_visible(self, visible):
        self.visible = visible
        self.calls.append(("visible", visible))


class RecordingHemisphereSink(RecordingSink):
    def __init__(self):
        super().__init__()
        self.ground_color = None

    def set_ground_color(self, color):
        self.ground_color = color
        self.calls.append(("ground_color", color))


class RecordingHelperSink(RecordingSink):
    def __init__(self):
        super().__init__()
        self.helper = None

    def set_helper_visible(self, visible, size, color):
        self.helper = (visible, size, color)
        self.calls.append(("helper", self.helper))


def utc(*args) -> datetime:
    """Shorthand for a UTC datetime."""
    return datetime(*args, tzinfo=timezone.utc)


def make_engine(clock: FixedClock | None = None, **options):
    """Engine with a fixed clock and reference year 2023 unless overridden."""
    from sunlight import SunlightConfig, SunLightEngine

    options.setdefault("reference_year", 2023)
    return SunLightEngine(SunlightConfig(**options), clock=clock or FixedClock(utc(2023, 6, 21, 12)))


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(utc(2024, 3, 1, 10))


@pytest.fixture
def engine(clock):
    return make_engine(clock)


@pytest.fixture
def published(engine):
    """States published by `engine` after the fixture was created."""
    states = []
    engine.on("state-changed", states.append)
    return states
