"""
Sun/moon lighting engine.

``SunLightEngine`` owns the time state and location, recomputes a complete
LightingState on every tick or effective mutation, and publishes it to
subscribers. It never touches scene objects; see ``sinks.LightRig`` for
pushing snapshots into a host's lights.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from .components.projection import compute_state
from .components.time_model import Clock, TimeModel, as_utc, system_clock
from .config import cached_presets, load_presets
from .constants import MAX_DEFERRED_RECOMPUTES
from .errors import ConfigurationError
from .events import EventEmitter, Listener, SunlightEvent, Unsubscribe
from .models.config import SunlightConfig
from .models.location import GeoLocation
from .models.state import LightingState
from .models.time import TimeState
from .models.weather import WeatherPreset
from .presets import LOCATION_PRESETS
from .sunlight_logging import get_logger
from .utils import same_value

logger = get_logger(__name__)


class SunLightEngine:
    """
    Orchestrates time resolution, ephemerides, weather blending and publishing.

    Every mutator validates its input, returns without publishing when the
    effective value is unchanged, and otherwise runs exactly one recompute.
    Subscribers are notified synchronously, in registration order, after the
    snapshot is complete.

    Mutating the engine from inside a notification is allowed. The new
    values are stored immediately, but the recompute they ask for is
    deferred until the current publish has finished and then run once.

    Args:
        config: Engine configuration. None uses ``SunlightConfig()``.
        clock: Wall-clock source for system-time mode and for the default
            reference year. None uses the real UTC clock.

    Example:
        >>> engine = SunLightEngine(SunlightConfig(latitude=35.68, longitude=139.65, timezone_offset_minutes=540))
        >>> unsubscribe = engine.on("state-changed", lambda state: print(state.sun.altitude_deg))
        >>> engine.set_time_of_day(7.5)
        >>> engine.set_weather("overcast")
        >>> unsubscribe()
    """

    def __init__(self, config: SunlightConfig | None = None, clock: Clock | None = None):
        self.config = config if config is not None else SunlightConfig()
        self._clock = clock or system_clock

        reference_year = self.config.reference_year
        if reference_year is None:
            reference_year = as_utc(self._clock()).year

        self._time = TimeModel(
            TimeState(
                reference_year=reference_year,
                day_of_year=self.config.day_of_year,
                time_of_day=self.config.time_of_day,
                timezone_offset_minutes=self.config.timezone_offset_minutes,
                use_system_time=self.config.use_system_time,
            ),
            clock=self._clock,
        )
        self._location = GeoLocation(self.config.latitude, self.config.longitude)
        self._weather = WeatherPreset.parse(self.config.weather)
        if self.config.presets_path is not None:
            self._tables = load_presets(self.config.presets_path)
        else:
            self._tables = cached_presets()

        self._events = EventEmitter()
        self._state: LightingState | None = None
        self._recomputing = False
        self._pending = False

        logger.info(
            f"Engine created at ({self._location.latitude:.4f}, {self._location.longitude:.4f}), "
            f"weather {self._weather.value}, system time {'on' if self._time.state.use_system_time else 'off'}"
        )
        self._recompute()

    # =========================================================================
    # Recompute / publish
    # =========================================================================

    def _recompute(self, instant: datetime | None = None, notice: tuple[SunlightEvent, Any] | None = None) -> None:
        """
        Publish a fresh snapshot, optionally announcing a change first.

        ``notice`` is an (event, payload) pair emitted inside the guard, so
        mutations made by its listeners fold into the pass that follows.
        """
        if self._recomputing:
            # Nested trigger from a subscriber: state is already mutated,
            # run the pass once the current publish returns.
            if notice is not None:
                self._events.emit(*notice)
            self._pending = True
            return

        self._recomputing = True
        try:
            if notice is not None:
                self._events.emit(*notice)
                # The pass below already sees anything its listeners changed
                self._pending = False
            self._publish(instant)
            deferred = 0
            while self._pending:
                self._pending = False
                if deferred >= MAX_DEFERRED_RECOMPUTES:
                    logger.warning(
                        f"Dropped nested recompute after {MAX_DEFERRED_RECOMPUTES} deferred passes; "
                        "a subscriber keeps mutating the engine on every state change"
                    )
                    break
                deferred += 1
                self._publish(instant)
        finally:
            self._recomputing = False
            self._pending = False

    def _publish(self, instant: datetime | None) -> None:
        resolved = self._time.resolve(instant)
        state = compute_state(
            resolved,
            self._location,
            self._weather,
            enable_moon=self.config.enable_moon,
            light_distance=self.config.light_distance,
            min_moon_illumination=self.config.min_moon_illumination,
            use_system_time=self._time.state.use_system_time,
            tables=self._tables,
            days=self._time.days(resolved),
        )
        self._state = state
        when = f"{resolved:%Y-%m-%d %H:%M:%S}Z" if resolved is not None else "NaN manual time"
        logger.debug(
            f"Recomputed {when}: sun alt {state.sun.altitude_deg:.2f}° "
            f"bearing {state.sun.compass_bearing:.1f}°, intensity {state.sun_intensity:.3f}"
        )
        self._events.emit(SunlightEvent.STATE_CHANGED, state)

    def update(self, instant: datetime | None = None) -> LightingState:
        """
        Recompute and publish for the current time (external tick).

        Args:
            instant: Explicit instant for this tick, e.g. from a host
                animation clock. It does not change the stored manual time.
                None resolves from the system clock or the manual fields.

        Returns:
            The snapshot published by this tick.
        """
        self._recompute(instant)
        return self._state

    # =========================================================================
    # Mutators
    # =========================================================================

    def set_latitude(self, latitude: float) -> None:
        self._set_location(self._location.with_latitude(latitude))

    def set_longitude(self, longitude: float) -> None:
        self._set_location(self._location.with_longitude(longitude))

    def set_location(self, latitude: float, longitude: float) -> None:
        """Set latitude and longitude together with a single recompute."""
        self._set_location(GeoLocation(latitude, longitude))

    def _set_location(self, location: GeoLocation) -> None:
        if same_value(location.latitude, self._location.latitude) and same_value(
            location.longitude, self._location.longitude
        ):
            return
        self._location = location
        self._recompute()

    def set_day_of_year(self, day: float) -> None:
        """Floor and clamp to the reference year. Overridden by the wall clock in system-time mode."""
        if self._time.set_day_of_year(day):
            self._recompute()

    def set_time_of_day(self, hours: float) -> None:
        """Wrap into [0, 24). Overridden by the wall clock in system-time mode."""
        if self._time.set_time_of_day(hours):
            self._recompute()

    def set_timezone_offset(self, minutes: float) -> None:
        if self._time.set_timezone_offset(minutes):
            self._recompute()

    def set_weather(self, weather: WeatherPreset | str) -> None:
        """
        Switch the weather preset.

        Publishes weather-changed, then recomputes.

        Raises:
            ConfigurationError: If the name is not a known preset.
        """
        weather = WeatherPreset.parse(weather)
        if weather == self._weather:
            return
        self._weather = weather
        logger.info(f"Weather changed to {weather.value}")
        self._recompute(notice=(SunlightEvent.WEATHER_CHANGED, weather))

    def set_use_system_time(self, enabled: bool) -> None:
        """
        Toggle wall-clock mode.

        Publishes system-time-toggled, then recomputes. Switching back to
        manual mode keeps the last clock-derived day and time.
        """
        if not self._time.set_use_system_time(enabled):
            return
        enabled = self._time.state.use_system_time
        logger.info(f"System time {'enabled' if enabled else 'disabled'}")
        self._recompute(notice=(SunlightEvent.SYSTEM_TIME_TOGGLED, enabled))

    def apply_location_preset(self, key: str) -> None:
        """
        Move to a named location and adopt its UTC offset in one recompute.

        Args:
            key: Key of ``presets.LOCATION_PRESETS`` (e.g. "tokyo").

        Raises:
            ConfigurationError: If the key is unknown.
        """
        preset = LOCATION_PRESETS.get(key)
        if preset is None:
            options = ", ".join(LOCATION_PRESETS)
            raise ConfigurationError("preset", f"unknown location preset {key!r} (expected one of: {options})")

        location = GeoLocation(preset.latitude, preset.longitude)
        changed = location != self._location
        self._location = location
        changed = self._time.set_timezone_offset(preset.utc_offset_minutes) or changed
        if changed:
            logger.info(f"Applied location preset {preset.label}")
            self._recompute()

    # =========================================================================
    # Accessors
    # =========================================================================

    def get_state(self) -> LightingState:
        return self._state

    def get_location(self) -> GeoLocation:
        return self._location

    def get_reference_year(self) -> int:
        return self._time.state.reference_year

    def get_day_of_year(self) -> int | float:
        return self._time.state.day_of_year

    def get_time_of_day(self) -> float:
        return self._time.state.time_of_day

    def get_timezone_offset(self) -> float:
        return self._time.state.timezone_offset_minutes

    def get_weather(self) -> WeatherPreset:
        return self._weather

    def uses_system_time(self) -> bool:
        return self._time.state.use_system_time

    def get_moon_phase(self) -> float | None:
        """Phase angle of the last snapshot in radians, None when the moon is disabled."""
        return self._state.moon_phase

    def get_moon_illumination(self) -> float | None:
        return self._state.moon_illumination

    # =========================================================================
    # Subscriptions
    # =========================================================================

    def on(self, event: SunlightEvent | str, listener: Listener) -> Unsubscribe:
        """
        Subscribe to "state-changed", "weather-changed" or "system-time-toggled".

        Returns:
            Callable that removes the subscription.
        """
        return self._events.on(event, listener)

    def dispose(self) -> None:
        """Drop every subscriber. The last snapshot stays readable."""
        self._events.clear()
        logger.debug("Engine disposed")
