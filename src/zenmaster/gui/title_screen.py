# -*- coding: utf-8 -*-
"""Opening screen."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from zenmaster.gui.swipe_area import SwipeArea


class TitleScreen(SwipeArea):
    """App title with a hint to swipe into the login form."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("titleScreen")
        self.title_label = QLabel("Being Peace")
        self.title_label.setObjectName("screenTitle")
        self.title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.hint_label = QLabel("Swipe left to begin your journey")
        self.hint_label.setObjectName("screenHint")
        self.hint_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 80, 24, 24)
        layout.setSpacing(12)
        layout.addWidget(self.title_label)
        layout.addWidget(self.hint_label)
        layout.addStretch(1)
