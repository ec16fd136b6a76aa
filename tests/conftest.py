"""
Pytest configuration and shared fixtures.
"""

import pytest

from smartparse.logger import StructuredLogger, get_logger, reset_logger


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Every test starts with default settings and a fresh global logger."""
    for var in ("SMARTPARSE_LOG_LEVEL", "SMARTPARSE_LOG_DIR", "SMARTPARSE_LOG_CONSOLE"):
        monkeypatch.delenv(var, raising=False)
    reset_logger()
    yield
    reset_logger()


@pytest.fixture
def logger() -> StructuredLogger:
    """The global logger, freshly created."""
    return get_logger()


@pytest.fixture
def sample_log_line() -> str:
    """A typical application log line."""
    return "12:42:53.546 INFO AppDelegate.loadSplashscreen():153 - Opening trackers"


@pytest.fixture
def sample_json_record() -> str:
    """A flat JSON record with one value of every supported kind."""
    return '{"name": "worker-1", "pid": 4211, "load": 0.75, "healthy": true, "parent": null}'
