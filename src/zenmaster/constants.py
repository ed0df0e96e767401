# -*- coding: utf-8 -*-
"""Application constants."""

APP_NAME = "ZenMaster"
APP_VERSION = "0.1.0"

DEFAULT_SETTINGS_FILE = "settings.json"
DEFAULT_PROFILE_FILE = "profile.json"

# Horizontal drag distance a swipe must exceed to be recognized.
SWIPE_THRESHOLD = 50.0

BREATH_INTERVAL_SECONDS = 4

PROFILE_KEY_NAME = "userName"
PROFILE_KEY_AGE = "userAge"
PROFILE_KEY_PHONE = "userPhone"
PROFILE_KEYS = (PROFILE_KEY_NAME, PROFILE_KEY_AGE, PROFILE_KEY_PHONE)

AGE_OPTIONS = tuple(str(age) for age in range(18, 101))

DEFAULT_WINDOW_SIZE = {"width": 390, "height": 844}

DEFAULT_HOTKEYS = {
    "swipe_left": "Right",
    "swipe_right": "Left",
    "home": "Home",
}
