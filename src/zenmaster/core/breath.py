# -*- coding: utf-8 -*-
"""Breathing-cycle oscillator for the zen screen."""

from __future__ import annotations

import logging
from collections.abc import Callable

from zenmaster.constants import BREATH_INTERVAL_SECONDS
from zenmaster.core.ticker import Ticker
from zenmaster.models.breath import BREATHE_IN, BREATHE_OUT, BreathKeyframe, BreathPhase

logger = logging.getLogger(__name__)


KeyframeCallback = Callable[[BreathPhase, BreathKeyframe], None]

_KEYFRAMES = {
    BreathPhase.IN: BREATHE_IN,
    BreathPhase.OUT: BREATHE_OUT,
}


def keyframe_for(phase: BreathPhase) -> BreathKeyframe:
    return _KEYFRAMES[phase]


class BreathOscillator:
    """Alternate between breathing in and out every ``interval`` seconds.

    The oscillator only supplies target keyframes at interval boundaries.
    Interpolating toward them is left to the renderer.
    """

    def __init__(
        self,
        ticker: Ticker,
        interval: float = BREATH_INTERVAL_SECONDS,
        on_keyframe: KeyframeCallback | None = None,
    ) -> None:
        if interval <= 0:
            raise ValueError(f"Breath interval must be positive, got {interval}")
        self._ticker = ticker
        self._interval = float(interval)
        self._on_keyframe = on_keyframe
        self._phase = BreathPhase.IN
        self._mounted = False

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def phase(self) -> BreathPhase:
        return self._phase

    @property
    def keyframe(self) -> BreathKeyframe:
        return keyframe_for(self._phase)

    @property
    def is_mounted(self) -> bool:
        return self._mounted

    def mount(self) -> None:
        if self._mounted:
            self._ticker.stop()
        self._mounted = True
        self._phase = BreathPhase.IN
        logger.debug("Breath oscillator mounted (interval %.1fs)", self._interval)
        self._emit()
        self._ticker.start(self._interval, self.tick)

    def tick(self) -> None:
        # Stale timer fires after unmount must not touch state.
        if not self._mounted:
            return
        self._phase = self._phase.flipped()
        self._emit()

    def unmount(self) -> None:
        if not self._mounted:
            return
        self._ticker.stop()
        self._mounted = False
        self._phase = BreathPhase.IN
        logger.debug("Breath oscillator unmounted")

    def _emit(self) -> None:
        if self._on_keyframe is not None:
            self._on_keyframe(self._phase, self.keyframe)
