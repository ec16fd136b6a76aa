"""
Structured logging system for smartparse.

Provides centralized logging with optional console and file outputs,
log levels, and metrics tracking for monitoring how records are identified.
"""

import logging
import sys
from pathlib import Path
from typing import Optional
from datetime import datetime
import json


class StructuredLogger:
    """
    Centralized logger with support for console and file outputs.
    Tracks metrics for monitoring feature identification.
    """

    def __init__(
        self,
        name: str = "smartparse",
        level: str = "WARNING",
        log_dir: Optional[Path] = None,
        enable_file: bool = False,
        enable_console: bool = False,
    ):
        """
        Initialize the structured logger.

        Args:
            name: Logger name
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_dir: Directory for log files (default: logs/)
            enable_file: Write logs to file
            enable_console: Output logs to console
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(_level_value(level))
        for handler in self.logger.handlers:
            handler.close()
        self.logger.handlers.clear()  # Remove existing handlers
        self.logger.propagate = False

        # Metrics tracking
        self.metrics = {
            "records_identified": 0,
            "features_emitted": 0,
            "identifier_hits": {},
            "values_skipped": {},
        }

        # Console handler
        if enable_console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(_level_value(level))
            console_formatter = logging.Formatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            console_handler.setFormatter(console_formatter)
            self.logger.addHandler(console_handler)

        # File handler
        if enable_file:
            if log_dir is None:
                log_dir = Path("logs")
            log_dir.mkdir(parents=True, exist_ok=True)

            log_file = log_dir / f"smartparse_{datetime.now().strftime('%Y%m%d')}.log"
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)  # Always log everything to file
            file_formatter = logging.Formatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            file_handler.setFormatter(file_formatter)
            self.logger.addHandler(file_handler)
            # The file handler records DEBUG even when the console is quieter.
            self.logger.setLevel(logging.DEBUG)

        if not self.logger.handlers:
            self.logger.addHandler(logging.NullHandler())

    def debug(self, message: str, **kwargs):
        """Log debug message with optional context."""
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs):
        """Log info message with optional context."""
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message with optional context."""
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs):
        """Log error message with optional context."""
        self._log(logging.ERROR, message, kwargs)

    def critical(self, message: str, **kwargs):
        """Log critical message with optional context."""
        self._log(logging.CRITICAL, message, kwargs)

    def _log(self, level: int, message: str, context: dict):
        """Internal logging method with context."""
        if not self.logger.isEnabledFor(level):
            return
        if context:
            message = f"{message} | Context: {json.dumps(context, default=str)}"
        self.logger.log(level, message)

    # Metric tracking methods

    def record_identification(self, identifier: str, feature_count: int):
        """Record one identified record and the identifier that handled it."""
        self.metrics["records_identified"] += 1
        self.metrics["features_emitted"] += feature_count
        hits = self.metrics["identifier_hits"]
        hits[identifier] = hits.get(identifier, 0) + 1

    def record_skipped_value(self, reason: str):
        """Record a value dropped during identification."""
        skipped = self.metrics["values_skipped"]
        skipped[reason] = skipped.get(reason, 0) + 1

    def get_metrics(self) -> dict:
        """Return current metrics."""
        metrics_copy = {
            "records_identified": self.metrics["records_identified"],
            "features_emitted": self.metrics["features_emitted"],
            "identifier_hits": dict(self.metrics["identifier_hits"]),
            "values_skipped": dict(self.metrics["values_skipped"]),
            "identifier_share": {},
        }

        # Calculate how often each identifier handled a record
        total = metrics_copy["records_identified"]
        if total > 0:
            for identifier, hits in metrics_copy["identifier_hits"].items():
                metrics_copy["identifier_share"][identifier] = round(hits / total, 3)

        return metrics_copy

    def log_metrics_summary(self):
        """Log a summary of current metrics."""
        metrics = self.get_metrics()

        self.info("=== Identification Metrics ===")
        self.info(f"Records: {metrics['records_identified']}")
        self.info(f"Features: {metrics['features_emitted']}")

        if metrics["identifier_hits"]:
            self.info("Identifiers:")
            for identifier, hits in metrics["identifier_hits"].items():
                share = metrics["identifier_share"].get(identifier, 0) * 100
                self.info(f"  {identifier}: {hits} ({share:.1f}%)")

        if metrics["values_skipped"]:
            self.info("Skipped values:")
            for reason, count in metrics["values_skipped"].items():
                self.info(f"  {reason}: {count}")


def _level_value(level: str) -> int:
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level}")
    return value


# Global logger instance
_global_logger: Optional[StructuredLogger] = None


def get_logger(
    name: str = "smartparse",
    level: Optional[str] = None,
    **kwargs
) -> StructuredLogger:
    """
    Get or create the global logger instance.

    Settings not given explicitly are taken from the environment
    (see smartparse.env.get_settings).

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        **kwargs: Additional arguments passed to StructuredLogger

    Returns:
        StructuredLogger instance
    """
    global _global_logger

    if _global_logger is None:
        from .env import DEFAULT_SETTINGS, get_settings

        settings_error = None
        try:
            settings = get_settings()
        except ValueError as e:
            # Logging must not break identification; use the defaults instead.
            settings = dict(DEFAULT_SETTINGS)
            settings_error = str(e)
        if level is None:
            level = settings["log_level"]
        if settings["log_dir"] is not None:
            kwargs.setdefault("log_dir", settings["log_dir"])
            kwargs.setdefault("enable_file", True)
        kwargs.setdefault("enable_console", settings["log_console"])
        _global_logger = StructuredLogger(name=name, level=level, **kwargs)
        if settings_error is not None:
            _global_logger.warning("Ignoring invalid logging settings", error=settings_error)

    return _global_logger


def reset_logger():
    """Reset the global logger (useful for testing)."""
    global _global_logger
    _global_logger = None
