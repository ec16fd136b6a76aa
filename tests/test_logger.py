"""
Tests for logger functionality.
"""

import logging

import pytest

from smartparse.logger import StructuredLogger, get_logger, reset_logger


class TestStructuredLogger:
    """Test structured logging functionality."""

    def test_logger_creation(self):
        """Logger should be created quiet by default."""
        logger = StructuredLogger(name="test")

        assert logger.logger.name == "test"
        assert logger.logger.level == logging.WARNING
        assert logger.metrics["records_identified"] == 0
        assert all(isinstance(h, logging.NullHandler) for h in logger.logger.handlers)

    def test_log_methods(self, tmp_path):
        """All log level methods should work."""
        logger = StructuredLogger(name="test", log_dir=tmp_path, enable_file=True)

        # Should not raise exceptions
        logger.debug("Debug message")
        logger.info("Info message")
        logger.warning("Warning message")
        logger.error("Error message")
        logger.critical("Critical message")

    def test_log_with_context(self, tmp_path):
        """Logging with context should include extra data."""
        logger = StructuredLogger(name="test-context", log_dir=tmp_path, enable_file=True)

        logger.warning("Message with context", identifier="json", count=5)

        log_content = next(tmp_path.glob("*.log")).read_text()
        assert 'Message with context | Context: {"identifier": "json", "count": 5}' in log_content

    def test_log_file_creation(self, tmp_path):
        """Log file should be created in specified directory."""
        logger = StructuredLogger(name="test-file", log_dir=tmp_path, enable_file=True)

        logger.debug("Test message")

        log_files = list(tmp_path.glob("smartparse_*.log"))
        assert len(log_files) == 1
        assert "Test message" in log_files[0].read_text()

    def test_console_output(self, capsys):
        logger = StructuredLogger(name="test-console", level="INFO", enable_console=True)

        logger.info("Hello console")
        logger.debug("Hidden")

        out = capsys.readouterr().out
        assert "INFO     | test-console | Hello console" in out
        assert "Hidden" not in out

    def test_invalid_level(self):
        with pytest.raises(ValueError):
            StructuredLogger(name="test", level="LOUD")

    def test_metrics_tracking(self):
        """Metrics should be tracked correctly."""
        logger = StructuredLogger(name="test")

        logger.record_identification("json", 3)
        logger.record_identification("tokenize", 5)
        logger.record_identification("tokenize", 0)
        logger.record_skipped_value("nested")
        logger.record_skipped_value("nested")

        metrics = logger.get_metrics()

        assert metrics["records_identified"] == 3
        assert metrics["features_emitted"] == 8
        assert metrics["identifier_hits"] == {"json": 1, "tokenize": 2}
        assert metrics["values_skipped"] == {"nested": 2}
        assert metrics["identifier_share"]["json"] == pytest.approx(0.333, rel=0.01)

    def test_get_metrics_returns_copy(self):
        logger = StructuredLogger(name="test")
        logger.record_identification("json", 1)

        logger.get_metrics()["identifier_hits"]["json"] = 100

        assert logger.metrics["identifier_hits"]["json"] == 1

    def test_metrics_summary(self, tmp_path):
        logger = StructuredLogger(name="test-summary", level="INFO", log_dir=tmp_path, enable_file=True)
        logger.record_identification("json", 2)
        logger.record_skipped_value("number_out_of_range")

        logger.log_metrics_summary()

        log_content = next(tmp_path.glob("*.log")).read_text()
        assert "=== Identification Metrics ===" in log_content
        assert "json: 1 (100.0%)" in log_content
        assert "number_out_of_range: 1" in log_content


class TestGlobalLogger:
    """Test global logger singleton."""

    def test_get_logger_singleton(self):
        """get_logger should return same instance."""
        logger1 = get_logger()
        logger2 = get_logger()

        assert logger1 is logger2

    def test_reset_logger(self):
        """reset_logger should create new instance."""
        logger1 = get_logger()
        logger1.record_identification("json", 1)

        reset_logger()

        logger2 = get_logger()

        assert logger2 is not logger1
        assert logger2.metrics["records_identified"] == 0

    def test_settings_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("SMARTPARSE_LOG_LEVEL", "debug")
        monkeypatch.setenv("SMARTPARSE_LOG_DIR", str(tmp_path / "logs"))

        logger = get_logger()
        logger.debug("From the environment")

        log_files = list((tmp_path / "logs").glob("*.log"))
        assert len(log_files) == 1
        assert "From the environment" in log_files[0].read_text()

    def test_explicit_arguments_win(self, monkeypatch):
        monkeypatch.setenv("SMARTPARSE_LOG_LEVEL", "DEBUG")

        logger = get_logger(level="ERROR")

        assert logger.logger.level == logging.ERROR

    def test_invalid_level_setting_falls_back_to_defaults(self, monkeypatch, capsys):
        """A bad SMARTPARSE_LOG_LEVEL leaves the logger at WARNING instead of raising."""
        monkeypatch.setenv("SMARTPARSE_LOG_LEVEL", "chatty")

        logger = get_logger(enable_console=True)

        assert logger.logger.level == logging.WARNING
        out = capsys.readouterr().out
        assert "Ignoring invalid logging settings" in out
        assert "SMARTPARSE_LOG_LEVEL" in out
