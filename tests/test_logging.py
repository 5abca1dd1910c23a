"""
Tests for ifwcheck.logging module.
"""

from __future__ import annotations

from ifwcheck.logging import (
    DefaultLogger,
    SilentLogger,
    get_global_logger,
    get_logger,
    set_global_logger,
)


class TestDefaultLogger:
    """Tests for verbosity handling."""

    def test_quiet_logger_prints_warnings_only(self, capsys):
        """Test that warnings print even without verbose mode."""
        logger = get_logger()

        logger.verbose("IFW", "hidden")
        logger.debug("IFW", "hidden")
        logger.warning("IFW", "shown")

        assert capsys.readouterr().out == "[IFW] WARNING: shown\n"

    def test_debug_implies_verbose(self, capsys):
        """Test that debug mode also prints verbose messages."""
        logger = DefaultLogger(debug=True)

        logger.verbose("CHECK", "a")
        logger.debug("HTTP", "b")

        assert capsys.readouterr().out == "[CHECK] a\n[HTTP] b\n"

    def test_step(self, capsys):
        """Test step formatting."""
        DefaultLogger().step(1, 2, "Checking updates...")

        assert capsys.readouterr().out == "[1/2] Checking updates...\n"


class TestGlobalLogger:
    """Tests for the global logger."""

    def test_default_is_silent(self, capsys):
        """Test that the global logger prints nothing by default."""
        logger = get_global_logger()

        logger.warning("IFW", "x")

        assert isinstance(logger, SilentLogger)
        assert capsys.readouterr().out == ""

    def test_set_global_logger(self):
        """Test replacing the global logger."""
        logger = DefaultLogger(verbose=True)

        set_global_logger(logger)

        assert get_global_logger() is logger
