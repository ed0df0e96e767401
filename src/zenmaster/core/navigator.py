# -*- coding: utf-8 -*-
"""Swipe-driven navigation across the app screens."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from typing import Protocol

from zenmaster.constants import SWIPE_THRESHOLD
from zenmaster.models.screen import Screen, SwipeDirection
from zenmaster.models.user_profile import UserProfile

logger = logging.getLogger(__name__)


ScreenChangeCallback = Callable[[Screen, Screen], None]


class ProfileWriter(Protocol):
    def save(self, profile: UserProfile) -> object: ...


# Zen leaves to Welcome in both directions.
TRANSITIONS: dict[Screen, dict[SwipeDirection, Screen]] = {
    Screen.TITLE: {SwipeDirection.LEFT: Screen.LOGIN, SwipeDirection.RIGHT: Screen.TITLE},
    Screen.LOGIN: {SwipeDirection.LEFT: Screen.WELCOME, SwipeDirection.RIGHT: Screen.TITLE},
    Screen.WELCOME: {SwipeDirection.LEFT: Screen.ZEN, SwipeDirection.RIGHT: Screen.LOGIN},
    Screen.ZEN: {SwipeDirection.LEFT: Screen.WELCOME, SwipeDirection.RIGHT: Screen.WELCOME},
}


def next_screen(screen: Screen, direction: SwipeDirection) -> Screen:
    """Look up the screen reached by swiping in ``direction`` from ``screen``."""
    return TRANSITIONS[screen][direction]


class Navigator:
    """Hold the current screen and apply swipes and login commits to it."""

    def __init__(
        self,
        profile_store: ProfileWriter | None = None,
        on_change: ScreenChangeCallback | None = None,
        threshold: float = SWIPE_THRESHOLD,
    ) -> None:
        self._screen = Screen.TITLE
        self._profile_store = profile_store
        self._on_change = on_change
        self._threshold = float(threshold)

    @property
    def threshold(self) -> float:
        return self._threshold

    def current(self) -> Screen:
        return self._screen

    def classify_swipe(self, translation_width: float) -> SwipeDirection | None:
        """Map a horizontal drag translation to a swipe direction, if any."""
        if not self._exceeds_threshold(translation_width):
            return None
        return SwipeDirection.LEFT if translation_width < 0 else SwipeDirection.RIGHT

    def handle_swipe(self, direction: SwipeDirection, magnitude: float) -> Screen:
        if not self._exceeds_threshold(magnitude):
            logger.debug("Ignoring %s swipe below threshold: %s", direction.value, magnitude)
            return self._screen
        self._set_screen(next_screen(self._screen, direction))
        return self._screen

    def handle_drag(self, translation_width: float) -> Screen:
        """Apply a raw drag-end event with the given horizontal translation."""
        direction = self.classify_swipe(translation_width)
        if direction is None:
            logger.debug("Ignoring drag of width %s", translation_width)
            return self._screen
        return self.handle_swipe(direction, translation_width)

    def commit_login(self, profile: UserProfile) -> Screen:
        """Persist the login form and move to the welcome screen."""
        if self._profile_store is not None:
            self._profile_store.save(profile)
        logger.info("Login committed for %r (age %s)", profile.name, profile.age or "-")
        self._set_screen(Screen.WELCOME)
        return self._screen

    def go_to(self, screen: Screen) -> Screen:
        self._set_screen(screen)
        return self._screen

    def _exceeds_threshold(self, magnitude: float) -> bool:
        try:
            value = abs(float(magnitude))
        except (TypeError, ValueError):
            return False
        if not math.isfinite(value):
            return False
        return value > self._threshold

    def _set_screen(self, screen: Screen) -> None:
        previous = self._screen
        if screen is previous:
            return
        self._screen = screen
        logger.info("Screen changed: %s -> %s", previous.value, screen.value)
        if self._on_change is not None:
            self._on_change(previous, screen)
