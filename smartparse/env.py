import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
TRUTHY = {"1", "true", "yes", "on"}
DEFAULT_SETTINGS = {"log_level": "WARNING", "log_dir": None, "log_console": False}


def load_env(env_path: Optional[Path] = None) -> bool:
    """Load .env from the working directory if present.

    Variables already set in the process environment win.
    Returns True when a file was loaded.
    """
    if env_path is None:
        env_path = Path.cwd() / ".env"
    if not env_path.exists():
        return False
    return load_dotenv(dotenv_path=env_path, override=False)


def get_settings() -> Dict[str, Any]:
    """
    Read smartparse settings from the environment.

    Returns a dict with:
        log_level: SMARTPARSE_LOG_LEVEL (default WARNING)
        log_dir: SMARTPARSE_LOG_DIR as a Path, or None (file logging off)
        log_console: SMARTPARSE_LOG_CONSOLE parsed as a flag (default off)

    Raises:
        ValueError: If SMARTPARSE_LOG_LEVEL is not a known level
    """
    level = os.getenv("SMARTPARSE_LOG_LEVEL", DEFAULT_SETTINGS["log_level"]).strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(
            f"SMARTPARSE_LOG_LEVEL must be one of {sorted(LOG_LEVELS)}, got {level!r}"
        )

    log_dir = os.getenv("SMARTPARSE_LOG_DIR", "").strip()
    console = os.getenv("SMARTPARSE_LOG_CONSOLE", "").strip().lower()

    return {
        "log_level": level,
        "log_dir": Path(log_dir) if log_dir else None,
        "log_console": console in TRUTHY,
    }
