# -*- coding: utf-8 -*-
"""User profile data model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class UserProfile:
    """Fields collected by the login form. Values are kept as plain text."""

    name: str = ""
    age: str = ""
    phone: str = ""

    def is_empty(self) -> bool:
        return not (self.name or self.age or self.phone)
