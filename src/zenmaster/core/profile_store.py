# -*- coding: utf-8 -*-
"""Key-value persistence for the user profile."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from zenmaster.constants import (
    DEFAULT_PROFILE_FILE,
    PROFILE_KEY_AGE,
    PROFILE_KEY_NAME,
    PROFILE_KEY_PHONE,
    PROFILE_KEYS,
)
from zenmaster.models.user_profile import UserProfile
from zenmaster.utils.file_utils import read_json_file, write_json_file

logger = logging.getLogger(__name__)


class ProfileStore:
    """Store plain-text profile fields by key in a JSON file."""

    def __init__(self, path: str | Path = DEFAULT_PROFILE_FILE) -> None:
        self.path = Path(path)

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            return read_json_file(self.path)
        except (OSError, ValueError) as exc:
            logger.warning("Could not read profile store %s: %s", self.path, exc)
            return {}

    def get(self, key: str, default: str = "") -> str:
        value = self._read().get(key, default)
        return "" if value is None else str(value)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = str(value)
        write_json_file(self.path, data)

    def load(self) -> UserProfile:
        data = self._read()
        return UserProfile(
            name=str(data.get(PROFILE_KEY_NAME, "")),
            age=str(data.get(PROFILE_KEY_AGE, "")),
            phone=str(data.get(PROFILE_KEY_PHONE, "")),
        )

    def save(self, profile: UserProfile) -> Path:
        """Write all profile fields, keeping unrelated keys in the file."""
        data = self._read()
        data[PROFILE_KEY_NAME] = profile.name
        data[PROFILE_KEY_AGE] = profile.age
        data[PROFILE_KEY_PHONE] = profile.phone
        logger.debug("Saving profile to %s", self.path)
        return write_json_file(self.path, data)

    def clear(self) -> None:
        data = self._read()
        if not any(key in data for key in PROFILE_KEYS):
            return
        for key in PROFILE_KEYS:
            data.pop(key, None)
        write_json_file(self.path, data)
