# -*- coding: utf-8 -*-
"""Screen and swipe enumerations."""

from __future__ import annotations

from enum import Enum


class Screen(Enum):
    """Top-level views the app can display."""

    TITLE = "title"
    LOGIN = "login"
    WELCOME = "welcome"
    ZEN = "zen"


class SwipeDirection(Enum):
    """Direction of a recognized horizontal swipe."""

    LEFT = "left"
    RIGHT = "right"
