# -*- coding: utf-8 -*-
"""Breathing phase and keyframe models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class BreathPhase(Enum):
    IN = "in"
    OUT = "out"

    def flipped(self) -> "BreathPhase":
        return BreathPhase.OUT if self is BreathPhase.IN else BreathPhase.IN


@dataclass(frozen=True)
class BreathKeyframe:
    """Target pose the renderer animates toward over one interval."""

    scale: float
    opacity: float
    label: str


BREATHE_IN = BreathKeyframe(scale=1.2, opacity=1.0, label="Breathe in")
BREATHE_OUT = BreathKeyframe(scale=0.8, opacity=0.95, label="Breathe out")
