"""Logging configuration for StronglyTyped."""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path


def get_log_dir() -> Path:
    """Return the XDG state directory used for log files."""
    xdg_state_home = os.environ.get(
        "XDG_STATE_HOME", str(Path.home() / ".local" / "state")
    )
    return Path(xdg_state_home) / "stronglytyped"


def setup_logging(level: int = logging.INFO, console: bool = False) -> Path:
    """Configure root logging with a rotating file handler.

    Args:
        level: Root log level
        console: Also log to stderr

    Returns:
        Path of the log file
    """
    log_dir = get_log_dir()
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "stronglytyped.log"

    # 1MB max, keep 3 backups
    handlers: list[logging.Handler] = [
        RotatingFileHandler(log_file, maxBytes=1024 * 1024, backupCount=3)
    ]
    if console:
        handlers.append(logging.StreamHandler())

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )
    return log_file
