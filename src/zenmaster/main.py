# -*- coding: utf-8 -*-
"""Application entry point."""

from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path

from PyQt6.QtWidgets import QApplication, QMessageBox

from zenmaster.config import ConfigError, get_default_config, load_config, resolve_profile_path
from zenmaster.constants import APP_NAME, DEFAULT_SETTINGS_FILE
from zenmaster.core.profile_store import ProfileStore
from zenmaster.gui.main_window import MainWindow
from zenmaster.utils.logger import setup_session_logging

logger = logging.getLogger(__name__)


def global_exception_handler(exc_type, exc_value, exc_traceback) -> None:
    """Log fatal errors and keep a copy of the last crash on disk."""
    error_msg = "".join(traceback.format_exception(exc_type, exc_value, exc_traceback))
    logging.getLogger().critical("FATAL CRASH:\n%s", error_msg)

    crash_path = Path.cwd() / "logs" / "LAST_CRASH.log"
    try:
        crash_path.parent.mkdir(parents=True, exist_ok=True)
        crash_path.write_text(error_msg, encoding="utf-8")
    except OSError as exc:
        logging.getLogger().error("Could not write crash report: %s", exc)

    if QApplication.instance() is not None:
        QMessageBox.critical(None, APP_NAME, f"A fatal error occurred.\nDetails saved to: {crash_path}")

    sys.__excepthook__(exc_type, exc_value, exc_traceback)


def main(argv: list[str] | None = None) -> int:
    """Start the GUI application.

    An optional first argument names the settings file to use.
    """
    argv = list(sys.argv if argv is None else argv)
    sys.excepthook = global_exception_handler
    session_log_path = setup_session_logging(Path.cwd(), APP_NAME)
    app = QApplication(argv)
    if session_log_path is not None:
        logger.info("Session log file: %s", session_log_path)

    settings_path = Path(argv[1]) if len(argv) > 1 else Path(DEFAULT_SETTINGS_FILE)
    try:
        settings = load_config(settings_path)
    except (ConfigError, OSError, ValueError) as exc:
        logger.error("Invalid settings in %s: %s", settings_path, exc)
        QMessageBox.warning(None, APP_NAME, f"Settings in {settings_path} are invalid, using defaults.\n\n{exc}")
        settings = get_default_config()

    profile_store = ProfileStore(resolve_profile_path(settings, settings_path))
    logger.info("Using profile store %s", profile_store.path)

    window = MainWindow(settings=settings, profile_store=profile_store)
    window.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
