# -*- coding: utf-8 -*-
"""Base widget that reports horizontal drags as swipes."""

from __future__ import annotations

from PyQt6.QtCore import QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QMouseEvent
from PyQt6.QtWidgets import QWidget


class SwipeArea(QWidget):
    """Emit ``swiped`` with the horizontal translation of each left-button drag.

    Classifying the translation is left to the navigator, so every drag is
    reported, however short.
    """

    swiped = pyqtSignal(float)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._press_pos: QPointF | None = None
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            self._press_pos = event.position()
        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton and self._press_pos is not None:
            translation = event.position().x() - self._press_pos.x()
            self._press_pos = None
            self.swiped.emit(float(translation))
        super().mouseReleaseEvent(event)
