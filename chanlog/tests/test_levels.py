"""Tests for severity levels and drivers."""
import logging

import pytest

from chanlog.core.logger.levels import Driver, Level


class TestLevelOrdering:
    def test_panic_is_most_restrictive(self):
        assert Level.PANIC < Level.FATAL < Level.ERROR < Level.WARN < Level.INFO < Level.DEBUG < Level.TRACE

    def test_stdlib_numbers_descend_with_verbosity(self):
        numbers = [lv.to_logging() for lv in Level]
        assert numbers == sorted(numbers, reverse=True)

    def test_custom_level_names_registered(self):
        assert logging.getLevelName(Level.TRACE.to_logging()) == "TRACE"
        assert logging.getLevelName(Level.PANIC.to_logging()) == "PANIC"


class TestLevelParse:
    @pytest.mark.parametrize("raw, expected", [
        ("debug", Level.DEBUG),
        ("WARNING", Level.WARN),
        ("warn", Level.WARN),
        (" Trace ", Level.TRACE),
        (4, Level.INFO),
        (Level.PANIC, Level.PANIC),
    ])
    def test_parse(self, raw, expected):
        assert Level.parse(raw) is expected

    def test_unknown_name_raises(self):
        with pytest.raises(ValueError, match="Unknown level"):
            Level.parse("verbose")

    def test_out_of_range_int_raises(self):
        with pytest.raises(ValueError):
            Level.parse(42)

    def test_labels(self):
        assert Level.WARN.label == "warning"
        assert Level.FATAL.label == "fatal"


class TestFromLogging:
    @pytest.mark.parametrize("levelno, expected", [
        (logging.INFO, Level.INFO),
        (25, Level.INFO),
        (logging.CRITICAL, Level.FATAL),
        (100, Level.PANIC),
        (5, Level.TRACE),
        (1, Level.TRACE),
    ])
    def test_nearest_level_at_or_below(self, levelno, expected):
        assert Level.from_logging(levelno) is expected


class TestDriver:
    def test_parse_names(self):
        assert Driver.parse("daily") is Driver.DAILY
        assert Driver.parse("SINGLE") is Driver.SINGLE
        assert Driver.parse(1) is Driver.DAILY

    def test_unknown_driver_raises(self):
        with pytest.raises(ValueError, match="Unknown driver"):
            Driver.parse("hourly")
