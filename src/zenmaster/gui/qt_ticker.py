# -*- coding: utf-8 -*-
"""QTimer-backed ticker for the breathing oscillator."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QTimer

from zenmaster.core.ticker import TickCallback


class QtTicker:
    """Repeating timer on the Qt event loop, cancelled by ``stop``."""

    def __init__(self, parent: QObject | None = None) -> None:
        self.timer = QTimer(parent)
        self.timer.setSingleShot(False)
        self._callback: TickCallback | None = None
        self.timer.timeout.connect(self._on_timeout)

    @property
    def is_active(self) -> bool:
        return self.timer.isActive()

    def start(self, interval: float, callback: TickCallback) -> None:
        if interval <= 0:
            raise ValueError(f"Ticker interval must be positive, got {interval}")
        self._callback = callback
        self.timer.start(int(round(interval * 1000)))

    def stop(self) -> None:
        self.timer.stop()
        self._callback = None

    def _on_timeout(self) -> None:
        if self._callback is not None:
            self._callback()
