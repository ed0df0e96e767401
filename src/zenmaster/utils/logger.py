# -*- coding: utf-8 -*-
"""Logger setup for console and per-session log files."""

from __future__ import annotations

import logging
import os
from datetime import datetime
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def get_logger(name: str, log_file: str | Path | None = None) -> logging.Logger:
    """Return a logger with a console handler and an optional file handler."""
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(logging.DEBUG)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def _level_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else default


def setup_session_logging(base_dir: str | Path, app_name: str) -> Path | None:
    """Configure root logging once per process and open a session log file.

    The level defaults to DEBUG and can be lowered with ``ZENMASTER_LOG_LEVEL``.
    Returns the session log path, or ``None`` if the file could not be opened.
    """
    root = logging.getLogger()
    if getattr(root, "_zenmaster_logging_configured", False):
        return getattr(root, "_zenmaster_session_log", None)

    level = _level_from_env("ZENMASTER_LOG_LEVEL", logging.DEBUG)
    root.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if not any(isinstance(handler, logging.StreamHandler) for handler in root.handlers):
        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(level)
        stream_handler.setFormatter(formatter)
        root.addHandler(stream_handler)

    logs_dir = Path(base_dir) / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    safe_app_name = app_name.lower().replace(" ", "-")
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    session_log_path: Path | None = logs_dir / f"{safe_app_name}-{timestamp}.log"
    try:
        file_handler = logging.FileHandler(session_log_path, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
        root.info("Session log file established: %s", session_log_path)
    except OSError as exc:
        root.error("Failed to establish session log file: %s", exc)
        session_log_path = None

    root._zenmaster_logging_configured = True  # type: ignore[attr-defined]
    root._zenmaster_session_log = session_log_path  # type: ignore[attr-defined]
    return session_log_path
