"""
Synchronous notifications published by the engine.

Topic registry keyed by SunlightEvent. Listeners run on the caller's
thread, in registration order, and exceptions they raise propagate to
whoever triggered the emit.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable
from enum import Enum
from typing import Any

Listener = Callable[[Any], None]
Unsubscribe = Callable[[], None]


class SunlightEvent(str, Enum):
    """Notification topics and their payload types."""

    STATE_CHANGED = "state-changed"  # LightingState
    WEATHER_CHANGED = "weather-changed"  # WeatherPreset
    SYSTEM_TIME_TOGGLED = "system-time-toggled"  # bool

    def __str__(self) -> str:
        return self.value


class EventEmitter:
    """
    Per-topic listener lists.

    Example:
        >>> emitter = EventEmitter()
        >>> unsubscribe = emitter.on(SunlightEvent.WEATHER_CHANGED, print)
        >>> emitter.emit(SunlightEvent.WEATHER_CHANGED, "overcast")
        overcast
        >>> unsubscribe()
    """

    def __init__(self):
        # Each registration is boxed so duplicates of one callable stay distinct
        self._listeners: dict[SunlightEvent, list[list[Listener]]] = defaultdict(list)

    def on(self, event: SunlightEvent | str, listener: Listener) -> Unsubscribe:
        """
        Register a listener for a topic.

        The same callable may be registered more than once; each
        registration is called and removed independently.

        Args:
            event: Topic (enum member or its string value).
            listener: Called with the event payload.

        Returns:
            Callable that removes this registration. Calling it twice is a no-op.
        """
        topic = SunlightEvent(event)
        entry = [listener]
        self._listeners[topic].append(entry)

        def unsubscribe() -> None:
            entries = self._listeners.get(topic, [])
            for i, existing in enumerate(entries):
                if existing is entry:
                    del entries[i]
                    break

        return unsubscribe

    def emit(self, event: SunlightEvent | str, payload: Any) -> None:
        """Call every listener of a topic with the payload."""
        # Snapshot so listeners may (un)subscribe while being notified
        for entry in list(self._listeners.get(SunlightEvent(event), [])):
            entry[0](payload)

    def listener_count(self, event: SunlightEvent | str) -> int:
        return len(self._listeners.get(SunlightEvent(event), []))

    def clear(self) -> None:
        """Drop every listener of every topic."""
        self._listeners.clear()
