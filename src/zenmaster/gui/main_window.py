# -*- coding: utf-8 -*-
"""Main window hosting the four app screens."""

from __future__ import annotations

import logging
from typing import Any

from PyQt6.QtGui import QCloseEvent, QKeySequence, QShortcut
from PyQt6.QtWidgets import QMainWindow, QStackedWidget, QWidget

from zenmaster.config import resolve_profile_path
from zenmaster.constants import APP_NAME, APP_VERSION, BREATH_INTERVAL_SECONDS, DEFAULT_WINDOW_SIZE
from zenmaster.core.profile_store import ProfileStore
from zenmaster.gui.controller import AppController
from zenmaster.gui.login_screen import LoginScreen
from zenmaster.gui.swipe_area import SwipeArea
from zenmaster.gui.title_screen import TitleScreen
from zenmaster.gui.welcome_screen import WelcomeScreen
from zenmaster.gui.zen_screen import ZenScreen
from zenmaster.models.screen import Screen

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Phone-sized window showing exactly one screen at a time."""

    def __init__(
        self,
        settings: dict[str, Any],
        profile_store: ProfileStore | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.settings = settings
        self.profile_store = profile_store or ProfileStore(resolve_profile_path(settings))
        self.controller = AppController(settings, self.profile_store)

        window = {**DEFAULT_WINDOW_SIZE, **self.settings.get("window", {})}
        self.setWindowTitle(f"{APP_NAME} v{APP_VERSION}")
        self.resize(int(window["width"]), int(window["height"]))

        self._build_ui()
        self._apply_styles()
        self._bind_hotkeys()
        self.controller.screen_changed.connect(self._on_screen_changed)
        self._render(self.controller.current_screen())

    def _build_ui(self) -> None:
        interval = float(self.settings.get("breathing", {}).get("interval_seconds", BREATH_INTERVAL_SECONDS))
        self.title_screen = TitleScreen()
        self.login_screen = LoginScreen()
        self.welcome_screen = WelcomeScreen()
        self.zen_screen = ZenScreen(interval=interval)

        self.pages: dict[Screen, SwipeArea] = {
            Screen.TITLE: self.title_screen,
            Screen.LOGIN: self.login_screen,
            Screen.WELCOME: self.welcome_screen,
            Screen.ZEN: self.zen_screen,
        }
        self.stack = QStackedWidget()
        for page in self.pages.values():
            page.swiped.connect(self.controller.handle_drag)
            self.stack.addWidget(page)
        self.login_screen.continue_requested.connect(self.controller.commit_login)
        self.setCentralWidget(self.stack)

    def _apply_styles(self) -> None:
        # No font-size rules for the breathing label: it animates its own font.
        self.setStyleSheet(
            """
            QWidget#titleScreen, QWidget#welcomeScreen {
                background: qlineargradient(x1:0, y1:0, x2:0, y2:1,
                    stop:0 #1f3b37, stop:1 #0c1716);
            }
            QWidget#loginScreen {
                background: qlineargradient(x1:0, y1:0, x2:0, y2:1,
                    stop:0 #2563eb, stop:1 #16a34a);
            }
            QWidget#zenScreen {
                background: #c8b48a;
            }
            QLabel {
                background: transparent;
                color: #ffffff;
            }
            QLabel#screenTitle {
                font-size: 28px;
                font-weight: 700;
            }
            QLabel#screenSubtitle {
                font-size: 20px;
            }
            QLabel#screenHint {
                font-size: 16px;
                color: rgba(255, 255, 255, 230);
            }
            QLabel#fieldLabel {
                font-size: 14px;
            }
            QLineEdit, QComboBox {
                background: #ffffff;
                color: #111827;
                border: 1px solid #cbd5e1;
                border-radius: 6px;
                padding: 6px 8px;
            }
            QPushButton#primaryButton {
                background: rgba(255, 255, 255, 230);
                color: #000000;
                border: none;
                border-radius: 12px;
                padding: 12px;
                margin: 0 40px;
                font-size: 18px;
            }
            QPushButton#primaryButton:pressed {
                background: #e5e7eb;
            }
            """
        )

    def _bind_hotkeys(self) -> None:
        hotkeys = self.settings.get("hotkeys", {})
        bindings = [
            (hotkeys.get("swipe_left"), self.controller.swipe_left),
            (hotkeys.get("swipe_right"), self.controller.swipe_right),
            (hotkeys.get("home"), self.controller.go_home),
        ]
        self._shortcuts: list[QShortcut] = []
        for sequence, handler in bindings:
            if not sequence:
                continue
            shortcut = QShortcut(QKeySequence(sequence), self)
            shortcut.activated.connect(handler)
            self._shortcuts.append(shortcut)

    def _on_screen_changed(self, previous: Screen, current: Screen) -> None:
        if previous is Screen.ZEN:
            self.zen_screen.unmount()
        self._render(current)

    def _render(self, screen: Screen) -> None:
        if screen is Screen.LOGIN:
            self.login_screen.reset_form()
        elif screen is Screen.WELCOME:
            self.welcome_screen.set_user_name(self.controller.profile().name)
        elif screen is Screen.ZEN:
            self.zen_screen.mount()
        self.stack.setCurrentWidget(self.pages[screen])

    def current_page(self) -> QWidget:
        return self.stack.currentWidget()

    def closeEvent(self, event: QCloseEvent) -> None:  # type: ignore[override]
        self.zen_screen.unmount()
        super().closeEvent(event)
