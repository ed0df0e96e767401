# -*- coding: utf-8 -*-
"""Label that eases its scale and opacity toward breathing keyframes."""

from __future__ import annotations

from PyQt6.QtCore import QAbstractAnimation, QEasingCurve, QParallelAnimationGroup, QPropertyAnimation, Qt, pyqtProperty
from PyQt6.QtWidgets import QGraphicsOpacityEffect, QLabel, QWidget

from zenmaster.models.breath import BreathKeyframe


class BreathingLabel(QLabel):
    """Render breathing keyframes.

    Scale is applied to the font size, opacity through a graphics effect.
    Both animate with an ease-in/ease-out curve so the pose keeps moving
    for the whole interval between keyframes. Font size must not be set
    from a style sheet, otherwise it would override the animated size.
    """

    def __init__(self, base_point_size: float = 32.0, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("breathLabel")
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._base_point_size = base_point_size
        self._breath_scale = 1.0

        font = self.font()
        font.setBold(True)
        font.setPointSizeF(base_point_size)
        self.setFont(font)

        self.opacity_effect = QGraphicsOpacityEffect(self)
        self.opacity_effect.setOpacity(1.0)
        self.setGraphicsEffect(self.opacity_effect)

        self._scale_animation = QPropertyAnimation(self, b"breathScale", self)
        self._opacity_animation = QPropertyAnimation(self.opacity_effect, b"opacity", self)
        self._animations = QParallelAnimationGroup(self)
        for animation in (self._scale_animation, self._opacity_animation):
            animation.setEasingCurve(QEasingCurve.Type.InOutSine)
            self._animations.addAnimation(animation)

    def _get_breath_scale(self) -> float:
        return self._breath_scale

    def _set_breath_scale(self, value: float) -> None:
        self._breath_scale = float(value)
        font = self.font()
        font.setPointSizeF(max(1.0, self._base_point_size * self._breath_scale))
        self.setFont(font)

    breathScale = pyqtProperty(float, fget=_get_breath_scale, fset=_set_breath_scale)

    def opacity(self) -> float:
        return self.opacity_effect.opacity()

    def animate_to(self, keyframe: BreathKeyframe, duration_ms: int) -> None:
        """Show the keyframe's label and start easing toward its pose."""
        self._animations.stop()
        self.setText(keyframe.label)
        self._scale_animation.setStartValue(self._breath_scale)
        self._scale_animation.setEndValue(float(keyframe.scale))
        self._opacity_animation.setStartValue(self.opacity_effect.opacity())
        self._opacity_animation.setEndValue(float(keyframe.opacity))
        for animation in (self._scale_animation, self._opacity_animation):
            animation.setDuration(max(0, int(duration_ms)))
        self._animations.start()

    def stop_animation(self) -> None:
        self._animations.stop()

    def reset_pose(self) -> None:
        """Stop animating and return to the resting pose (scale 1.0, opacity 1.0)."""
        self._animations.stop()
        self._set_breath_scale(1.0)
        self.opacity_effect.setOpacity(1.0)

    def pose(self) -> tuple[float, float]:
        return self._breath_scale, self.opacity_effect.opacity()

    def is_animating(self) -> bool:
        return self._animations.state() == QAbstractAnimation.State.Running
