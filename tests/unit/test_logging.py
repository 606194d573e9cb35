"""
Tests for hostprobe.probe_logging.

Tests cover:
- Custom levels and ProbeLogger methods
- setup_logging handler configuration
- apply_logging_options for --verbose, --debug and --stream-log-level
- Formatter output
"""

import logging

import pytest

from hostprobe.probe_logging import (
    DEBUG,
    RESULT,
    STATUS,
    VERBOSE,
    ColoredDebugFormatter,
    ColoredStandardFormatter,
    ProbeLogger,
    apply_logging_options,
    setup_logging,
)


@pytest.fixture
def probe_logger(request):
    """A freshly configured logger unique to the test."""
    _logger = setup_logging(f"hostprobe-test.{request.node.name}")
    yield _logger
    for handler in list(_logger.handlers):
        _logger.removeHandler(handler)


def _record(level, msg="message"):
    return logging.LogRecord("hostprobe", level, __file__, 42, msg, None, None)


class TestCustomLevels:
    def test_level_ordering(self):
        assert DEBUG < VERBOSE < logging.INFO < STATUS < logging.WARNING < RESULT < logging.ERROR

    def test_level_names_registered(self):
        assert logging.getLevelName(VERBOSE) == "VERBOSE"
        assert logging.getLevelName(STATUS) == "STATUS"
        assert logging.getLevelName(RESULT) == "RESULT"

    def test_logger_methods(self, probe_logger, caplog):
        with caplog.at_level(DEBUG, logger=probe_logger.name):
            probe_logger.verbose("verbose message")
            probe_logger.status("status message")
            probe_logger.result("result message")

        levels = [(r.levelname, r.getMessage()) for r in caplog.records]
        assert levels == [
            ("VERBOSE", "verbose message"),
            ("STATUS", "status message"),
            ("RESULT", "result message"),
        ]

    def test_records_point_at_caller(self, probe_logger, caplog):
        with caplog.at_level(DEBUG, logger=probe_logger.name):
            probe_logger.status("from the test")
        assert caplog.records[0].filename == "test_logging.py"


class TestSetupLogging:
    def test_returns_probe_logger(self, probe_logger):
        assert isinstance(probe_logger, ProbeLogger)
        assert probe_logger.level == DEBUG

    def test_single_stream_handler_at_default_level(self, probe_logger):
        assert len(probe_logger.handlers) == 1
        assert probe_logger.handlers[0].level == logging.WARNING

    def test_repeated_setup_does_not_stack_handlers(self, probe_logger):
        setup_logging(probe_logger.name)
        assert len(probe_logger.handlers) == 1

    def test_string_level(self, request):
        _logger = setup_logging(f"hostprobe-test.{request.node.name}", stream_log_level="info")
        assert _logger.handlers[0].level == logging.INFO

    def test_does_not_change_default_logger_class(self, probe_logger):
        assert logging.getLoggerClass() is logging.Logger


class TestApplyLoggingOptions:
    def test_verbose(self, probe_logger, sample_args):
        apply_logging_options(probe_logger, sample_args(verbose=True))
        assert probe_logger.handlers[0].level == VERBOSE

    def test_debug_switches_formatter(self, probe_logger, sample_args):
        apply_logging_options(probe_logger, sample_args(debug=True))
        handler = probe_logger.handlers[0]
        assert handler.level == DEBUG
        assert isinstance(handler.formatter, ColoredDebugFormatter)

    def test_stream_log_level_overrides(self, probe_logger, sample_args):
        apply_logging_options(probe_logger, sample_args(debug=True, stream_log_level="error"))
        assert probe_logger.handlers[0].level == logging.ERROR

    def test_no_options_keeps_level(self, probe_logger, sample_args):
        apply_logging_options(probe_logger, sample_args())
        assert probe_logger.handlers[0].level == logging.WARNING

    def test_none_args(self, mock_logger):
        apply_logging_options(mock_logger, None)


class TestFormatters:
    def test_standard_format(self):
        output = ColoredStandardFormatter().format(_record(logging.WARNING, "disk on fire"))
        assert "|WARNING: disk on fire" in output
        assert output.startswith("\033[0;33m")

    def test_debug_format_includes_location(self):
        output = ColoredDebugFormatter().format(_record(logging.ERROR, "bad"))
        assert "|ERROR:hostprobe:42: bad" in output
