# -*- coding: utf-8 -*-
"""Breathing exercise screen."""

from __future__ import annotations

import logging

from PyQt6.QtWidgets import QVBoxLayout, QWidget

from zenmaster.constants import BREATH_INTERVAL_SECONDS
from zenmaster.core.breath import BreathOscillator
from zenmaster.gui.breathing_label import BreathingLabel
from zenmaster.gui.qt_ticker import QtTicker
from zenmaster.gui.swipe_area import SwipeArea
from zenmaster.models.breath import BreathKeyframe, BreathPhase

logger = logging.getLogger(__name__)


class ZenScreen(SwipeArea):
    """Sand-toned room with a breathing prompt.

    The oscillator only runs while the screen is mounted; the owner calls
    ``mount`` when the screen becomes current and ``unmount`` when it leaves.
    """

    def __init__(self, interval: float = BREATH_INTERVAL_SECONDS, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("zenScreen")
        self.breath_label = BreathingLabel()
        self.ticker = QtTicker(self)
        self.oscillator = BreathOscillator(self.ticker, interval=interval, on_keyframe=self._apply_keyframe)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.addStretch(1)
        layout.addWidget(self.breath_label)
        layout.addStretch(1)

    def mount(self) -> None:
        self.breath_label.reset_pose()
        self.oscillator.mount()

    def unmount(self) -> None:
        self.oscillator.unmount()
        self.breath_label.reset_pose()

    def is_mounted(self) -> bool:
        return self.oscillator.is_mounted

    def _apply_keyframe(self, phase: BreathPhase, keyframe: BreathKeyframe) -> None:
        logger.debug("Breath phase %s", phase.value)
        self.breath_label.animate_to(keyframe, int(self.oscillator.interval * 1000))
