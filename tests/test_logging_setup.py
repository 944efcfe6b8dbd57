"""Tests for logging setup."""

import logging

from termprofiles.logging_setup import TRACE, parse_level, setup_logging_from_env


class TestParseLevel:
    """Tests for parse_level."""

    def test_trace_registered(self):
        """Test that TRACE is a named level."""
        assert logging.getLevelName(TRACE) == "TRACE"
        assert parse_level("trace") == TRACE

    def test_standard_names(self):
        """Test standard level names."""
        assert parse_level("INFO") == logging.INFO
        assert parse_level("debug") == logging.DEBUG

    def test_numeric(self):
        """Test numeric levels."""
        assert parse_level("15") == 15

    def test_default_on_empty_or_unknown(self):
        """Test fallback to WARNING."""
        assert parse_level(None) == logging.WARNING
        assert parse_level("loud") == logging.WARNING


class TestSetupLoggingFromEnv:
    """Tests for setup_logging_from_env."""

    def test_reads_env(self, monkeypatch):
        """Test that the env var sets the root level."""
        root = logging.getLogger()
        previous = root.level
        monkeypatch.setenv("TERMPROFILES_LOG_LEVEL", "INFO")
        try:
            setup_logging_from_env()
            assert root.level == logging.INFO
        finally:
            root.setLevel(previous)
