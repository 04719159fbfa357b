"""
Tests for hv_logging: custom levels, formatters and logger setup.
"""

import logging

import pytest

from hostvalidate import hv_logging
from hostvalidate.hv_logging import (
    COLORS,
    ColoredDebugFormatter,
    ColoredStandardFormatter,
    HVLogger,
    get_level_color,
    setup_logging,
)


def make_record(level, msg="message"):
    return logging.LogRecord("hostvalidate", level, __file__, 42, msg, None, None)


class TestLevels:

    def test_custom_level_values(self):
        assert hv_logging.VERBOSE < logging.INFO < hv_logging.STATUS < logging.WARNING < hv_logging.RESULT

    @pytest.mark.parametrize("name", ["RESULT", "STATUS", "VERBOSE"])
    def test_level_names_registered(self, name):
        assert logging.getLevelName(getattr(hv_logging, name)) == name

    def test_logger_has_level_methods(self):
        for method in ("result", "status", "verbose"):
            assert callable(getattr(HVLogger, method))

    def test_level_color(self):
        assert get_level_color(logging.WARNING) == COLORS.yellow.value
        assert get_level_color(12345) == COLORS.normal.value


class TestFormatters:

    def test_standard_format_plain(self):
        text = ColoredStandardFormatter(use_colors=False).format(make_record(logging.WARNING))
        assert text.endswith("|WARNING: message")
        assert "\033[" not in text

    def test_standard_format_colored(self):
        text = ColoredStandardFormatter(use_colors=True).format(make_record(logging.WARNING))
        assert text.startswith(COLORS.yellow.value)
        assert text.endswith(COLORS.normal.value)

    def test_debug_format_has_location(self):
        text = ColoredDebugFormatter(use_colors=False).format(make_record(logging.DEBUG))
        assert "|DEBUG:test_logging:42: message" in text


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_writes_to_stderr(self, capsys):
        logger = setup_logging("hv-test-stderr", stream_log_level="WARNING", use_colors=False)
        logger.warning("Received signal SIGINT (2)")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "WARNING: Received signal SIGINT (2)" in captured.err

    def test_level_filters(self, capsys):
        logger = setup_logging("hv-test-filter", stream_log_level="WARNING", use_colors=False)
        logger.debug("hidden")
        logger.status("hidden too")
        logger.result("shown")
        err = capsys.readouterr().err
        assert "hidden" not in err
        assert "RESULT: shown" in err

    def test_debug_level_uses_debug_formatter(self):
        logger = setup_logging("hv-test-debug", stream_log_level="DEBUG", use_colors=False)
        assert isinstance(logger.handlers[0].formatter, ColoredDebugFormatter)

    def test_numeric_level(self):
        logger = setup_logging("hv-test-numeric", stream_log_level=logging.INFO, use_colors=False)
        assert logger.handlers[0].level == logging.INFO
        assert isinstance(logger, HVLogger)
