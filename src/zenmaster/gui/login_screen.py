# -*- coding: utf-8 -*-
"""Login form collecting name, age and phone number."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QComboBox, QLabel, QLineEdit, QPushButton, QVBoxLayout, QWidget

from zenmaster.constants import AGE_OPTIONS
from zenmaster.gui.swipe_area import SwipeArea
from zenmaster.models.user_profile import UserProfile


class LoginScreen(SwipeArea):
    """Form whose inputs stay local until Continue is pressed."""

    continue_requested = pyqtSignal(UserProfile)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("loginScreen")
        self.title_label = QLabel("Login")
        self.title_label.setObjectName("screenTitle")
        self.title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self.name_input = QLineEdit()
        self.name_input.setPlaceholderText("Enter your name")
        self.age_input = QComboBox()
        self.age_input.addItems(AGE_OPTIONS)
        self.age_input.setPlaceholderText("Select your age")
        self.phone_input = QLineEdit()
        self.phone_input.setPlaceholderText("Enter your phone number")
        self.phone_input.setInputMethodHints(Qt.InputMethodHint.ImhDialableCharactersOnly)

        self.continue_button = QPushButton("Continue")
        self.continue_button.setObjectName("primaryButton")
        self.continue_button.clicked.connect(self._on_continue)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(20)
        layout.addStretch(1)
        layout.addWidget(self.title_label)
        layout.addLayout(self._field("Name", self.name_input))
        layout.addLayout(self._field("Age", self.age_input))
        layout.addLayout(self._field("Phone Number", self.phone_input))
        layout.addWidget(self.continue_button)
        layout.addStretch(1)
        self.reset_form()

    def _field(self, caption: str, editor: QWidget) -> QVBoxLayout:
        field_layout = QVBoxLayout()
        field_layout.setSpacing(4)
        label = QLabel(caption)
        label.setObjectName("fieldLabel")
        label.setBuddy(editor)
        field_layout.addWidget(label)
        field_layout.addWidget(editor)
        return field_layout

    def reset_form(self) -> None:
        """Clear the temporary inputs. Stored values are not prefilled."""
        self.name_input.clear()
        self.age_input.setCurrentIndex(-1)
        self.phone_input.clear()

    def form_profile(self) -> UserProfile:
        return UserProfile(
            name=self.name_input.text(),
            age=self.age_input.currentText(),
            phone=self.phone_input.text(),
        )

    def _on_continue(self) -> None:
        self.continue_requested.emit(self.form_profile())
