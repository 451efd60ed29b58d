"""Tests for host-aware logging."""

import logging

import pytest
import sunlight.sunlight_logging as slog
from conftest import make_engine


@pytest.fixture
def feedback():
    """Route every sunlight logger to a list for the duration of a test."""
    messages = []
    slog.set_global_feedback(lambda level, name, message: messages.append((level, name, message)))
    yield messages
    slog.set_global_feedback(None)
    slog.set_global_level(slog.LogLevel.INFO)


class TestSunlightLogger:
    def test_registry_returns_same_logger(self):
        assert slog.get_logger("sunlight.test") is slog.get_logger("sunlight.test")

    def test_level_filtering(self, feedback):
        logger = slog.get_logger("sunlight.test.levels")
        logger.debug("hidden")
        logger.info("shown")
        assert [m[2] for m in feedback if m[1] == "sunlight.test.levels"] == ["shown"]

    def test_feedback_applies_to_new_loggers(self, feedback):
        slog.get_logger("sunlight.test.late").warning("late")
        assert (int(slog.LogLevel.WARNING), "sunlight.test.late", "late") in feedback

    def test_routes_to_logging_without_feedback(self, caplog):
        with caplog.at_level(logging.INFO, logger="sunlight.test.std"):
            slog.get_logger("sunlight.test.std").info("to logging")
        assert "to logging" in caplog.text

    def test_set_level_accepts_int(self):
        logger = slog.get_logger("sunlight.test.int")
        logger.set_level(10)
        assert logger.level is slog.LogLevel.DEBUG
        logger.set_level(slog.LogLevel.INFO)


class TestEngineLogging:
    def test_weather_change_logged(self, feedback):
        engine = make_engine()
        engine.set_weather("overcast")
        assert any("overcast" in message for _, _, message in feedback)

    def test_recompute_debug_messages(self, feedback):
        slog.set_global_level(slog.LogLevel.DEBUG)
        engine = make_engine()
        feedback.clear()
        engine.set_time_of_day(15.0)
        debug = [m for level, name, m in feedback if level == slog.LogLevel.DEBUG and name == "sunlight.engine"]
        assert len(debug) == 1
        assert "sun alt" in debug[0]
