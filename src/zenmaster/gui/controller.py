# -*- coding: utf-8 -*-
"""Qt-facing controller around the navigator and profile store."""

from __future__ import annotations

import logging
from typing import Any

from PyQt6.QtCore import QObject, pyqtSignal

from zenmaster.constants import SWIPE_THRESHOLD
from zenmaster.core.navigator import Navigator
from zenmaster.core.profile_store import ProfileStore
from zenmaster.models.screen import Screen, SwipeDirection
from zenmaster.models.user_profile import UserProfile

logger = logging.getLogger(__name__)


class AppController(QObject):
    """
    Route gestures and form submissions to the navigator.
    Views listen to ``screen_changed`` and never mutate the screen themselves.
    """

    screen_changed = pyqtSignal(Screen, Screen)
    profile_committed = pyqtSignal(UserProfile)

    def __init__(self, settings: dict[str, Any], profile_store: ProfileStore) -> None:
        super().__init__()
        self.settings = settings
        self.profile_store = profile_store
        threshold = float(self.settings.get("navigation", {}).get("swipe_threshold", SWIPE_THRESHOLD))
        self.navigator = Navigator(
            profile_store=profile_store,
            on_change=self.screen_changed.emit,
            threshold=threshold,
        )

    def current_screen(self) -> Screen:
        return self.navigator.current()

    def handle_drag(self, translation_width: float) -> None:
        self.navigator.handle_drag(translation_width)

    def swipe(self, direction: SwipeDirection) -> None:
        """Apply a swipe that always clears the threshold, e.g. from a shortcut."""
        self.navigator.handle_swipe(direction, self.navigator.threshold + 1)

    def swipe_left(self) -> None:
        self.swipe(SwipeDirection.LEFT)

    def swipe_right(self) -> None:
        self.swipe(SwipeDirection.RIGHT)

    def go_home(self) -> None:
        self.navigator.go_to(Screen.TITLE)

    def commit_login(self, profile: UserProfile) -> None:
        self.navigator.commit_login(profile)
        self.profile_committed.emit(profile)

    def profile(self) -> UserProfile:
        return self.profile_store.load()
