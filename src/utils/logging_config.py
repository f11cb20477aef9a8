"""Application logging setup.

The command line prints its results on stdout, so the console handler
writes to stderr and defaults to warnings only. The rotating file under
the user data directory keeps the full record.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from utils.constants import APP_NAME, USER_DATA_DIR

LOG_FILE_NAME = "heblex.log"


def resolve_level(name: str | None, default: int = logging.INFO) -> int:
    """Map a level name from the config file (``"debug"``, ``"WARNING"``) to a number.

    Unknown names fall back to *default*.
    """
    level = logging.getLevelName((name or "").strip().upper())
    return level if isinstance(level, int) else default


def setup_logging(
    level: int = logging.INFO,
    log_dir: Path | None = None,
    console_level: int = logging.WARNING,
) -> None:
    """Configure the ``heblex`` logger tree.

    Args:
        level: Level of the application logger and its log file.
        log_dir: Directory for log files. Defaults to ~/.heblex/logs.
        console_level: Minimum level echoed to stderr.
    """
    log_dir = log_dir or (USER_DATA_DIR / "logs")
    log_dir.mkdir(parents=True, exist_ok=True)

    app_logger = logging.getLogger(APP_NAME)
    app_logger.setLevel(min(level, console_level))

    # Repeated calls must not stack handlers
    if app_logger.handlers:
        return

    fmt = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler()
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    app_logger.addHandler(console)

    # 5 MB, 3 backups
    file_handler = logging.handlers.RotatingFileHandler(
        log_dir / LOG_FILE_NAME,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(fmt)
    app_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Return a child logger in the application namespace."""
    return logging.getLogger(f"{APP_NAME}.{name}")
