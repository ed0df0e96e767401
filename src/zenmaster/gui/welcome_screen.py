# -*- coding: utf-8 -*-
"""Greeting shown after login."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from zenmaster.gui.swipe_area import SwipeArea


class WelcomeScreen(SwipeArea):
    """Greet the stored user by name."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("welcomeScreen")
        self.greeting_label = QLabel()
        self.greeting_label.setObjectName("screenTitle")
        self.greeting_label.setWordWrap(True)
        self.subtitle_label = QLabel("Enjoy your journey")
        self.subtitle_label.setObjectName("screenSubtitle")
        self.hint_label = QLabel("Swipe left or right to move \N{HERB}")
        self.hint_label.setObjectName("screenHint")
        for label in (self.greeting_label, self.subtitle_label, self.hint_label):
            label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(20)
        layout.addStretch(1)
        layout.addWidget(self.greeting_label)
        layout.addWidget(self.subtitle_label)
        layout.addWidget(self.hint_label)
        layout.addStretch(1)
        self.set_user_name("")

    def set_user_name(self, name: str) -> None:
        self.greeting_label.setText(f"Welcome, {name}!")
