"""
countdown/services/logging.py

Centralised logging for the countdown application.
Falls back gracefully when the log directory is not writable.
"""

import logging
import os
import sys
import tempfile
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOGGER_NAME = "countdown"
LOG_FILENAME = "countdown.log"


def _resolve_log_dir() -> Optional[Path]:
    """Pick a writable log directory, or ``None`` for console only."""
    override = (os.environ.get("COUNTDOWN_LOG_DIR") or "").strip()
    candidates = []
    if override:
        candidates.append(Path(override).expanduser())
    candidates.append(Path.home() / ".countdown" / "logs")
    candidates.append(Path(tempfile.gettempdir()) / "countdown_logs")

    for candidate in candidates:
        try:
            candidate.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            print(f"Warning: cannot create log directory {candidate}: {exc}", file=sys.stderr)
            continue
        return candidate
    return None


def default_level() -> int:
    if (os.environ.get("COUNTDOWN_DEBUG") or "").strip() in {"1", "true", "yes", "on"}:
        return logging.DEBUG
    return logging.INFO


def setup_logging(level: Optional[int] = None) -> logging.Logger:
    """
    Configure rotating file logging plus stderr.
    - Default level: INFO (DEBUG with COUNTDOWN_DEBUG=1)
    - Max size: 1 MB
    - 3 rotated files kept
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(default_level() if level is None else level)

    # Calling twice must not duplicate handlers
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    log_dir = _resolve_log_dir()
    if log_dir is not None:
        try:
            file_handler = RotatingFileHandler(
                log_dir / LOG_FILENAME, maxBytes=1_000_000, backupCount=3, encoding="utf-8"
            )
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
        except OSError as exc:
            print(f"Warning: cannot write log file: {exc}", file=sys.stderr)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    logger.info("Logging initialised")
    return logger
