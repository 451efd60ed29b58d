"""Tests for the event emitter."""

import pytest
from sunlight.events import EventEmitter, SunlightEvent


class TestEventEmitter:
    def test_emit_to_listeners_in_order(self):
        emitter = EventEmitter()
        calls = []
        emitter.on(SunlightEvent.STATE_CHANGED, lambda p: calls.append(("a", p)))
        emitter.on("state-changed", lambda p: calls.append(("b", p)))
        emitter.emit(SunlightEvent.STATE_CHANGED, 1)
        assert calls == [("a", 1), ("b", 1)]

    def test_topics_are_separate(self):
        emitter = EventEmitter()
        calls = []
        emitter.on("weather-changed", calls.append)
        emitter.emit("system-time-toggled", True)
        assert calls == []

    def test_unknown_topic(self):
        with pytest.raises(ValueError):
            EventEmitter().on("moon-rose", print)

    def test_duplicate_registration_removed_independently(self):
        emitter = EventEmitter()
        calls = []
        first = emitter.on("weather-changed", calls.append)
        emitter.on("weather-changed", calls.append)
        first()
        first()
        emitter.emit("weather-changed", "x")
        assert calls == ["x"]
        assert emitter.listener_count("weather-changed") == 1

    def test_unsubscribe_during_emit(self):
        emitter = EventEmitter()
        calls = []
        unsubscribe_b = None

        def a(payload):
            calls.append("a")
            unsubscribe_b()

        emitter.on("state-changed", a)
        unsubscribe_b = emitter.on("state-changed", lambda p: calls.append("b"))
        emitter.emit("state-changed", None)
        emitter.emit("state-changed", None)
        assert calls == ["a", "b", "a"]

    def test_clear(self):
        emitter = EventEmitter()
        emitter.on("state-changed", print)
        emitter.clear()
        assert emitter.listener_count("state-changed") == 0
