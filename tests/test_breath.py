# -*- coding: utf-8 -*-
"""Tests for the breathing oscillator."""

from __future__ import annotations

import pytest

from zenmaster.core.breath import BreathOscillator, keyframe_for
from zenmaster.core.ticker import ManualTicker
from zenmaster.models.breath import BREATHE_IN, BREATHE_OUT, BreathKeyframe, BreathPhase


def _oscillator(ticker: ManualTicker, interval: float = 4.0):
    emitted: list[tuple[BreathPhase, BreathKeyframe]] = []
    oscillator = BreathOscillator(ticker, interval=interval, on_keyframe=lambda p, k: emitted.append((p, k)))
    return oscillator, emitted


def test_keyframes_match_phases() -> None:
    assert keyframe_for(BreathPhase.IN) == BreathKeyframe(scale=1.2, opacity=1.0, label="Breathe in")
    assert keyframe_for(BreathPhase.OUT) == BreathKeyframe(scale=0.8, opacity=0.95, label="Breathe out")


def test_mount_applies_initial_keyframe_immediately(manual_ticker: ManualTicker) -> None:
    oscillator, emitted = _oscillator(manual_ticker)
    oscillator.mount()
    assert oscillator.phase is BreathPhase.IN
    assert oscillator.keyframe.scale == 1.2
    assert oscillator.keyframe.opacity == 1.0
    assert emitted == [(BreathPhase.IN, BREATHE_IN)]
    assert manual_ticker.is_active
    assert manual_ticker.interval == 4.0


def test_flips_once_per_interval(manual_ticker: ManualTicker) -> None:
    oscillator, emitted = _oscillator(manual_ticker)
    oscillator.mount()

    manual_ticker.advance(3.9)
    assert oscillator.phase is BreathPhase.IN

    manual_ticker.advance(0.1)
    assert oscillator.phase is BreathPhase.OUT
    assert oscillator.keyframe == BreathKeyframe(scale=0.8, opacity=0.95, label="Breathe out")

    manual_ticker.advance(4.0)
    assert oscillator.phase is BreathPhase.IN
    assert [phase for phase, _ in emitted] == [BreathPhase.IN, BreathPhase.OUT, BreathPhase.IN]


def test_long_advance_fires_every_interval(manual_ticker: ManualTicker) -> None:
    oscillator, emitted = _oscillator(manual_ticker)
    oscillator.mount()
    assert manual_ticker.advance(20.0) == 5
    assert oscillator.phase is BreathPhase.OUT
    assert [k for _, k in emitted] == [BREATHE_IN, BREATHE_OUT, BREATHE_IN, BREATHE_OUT, BREATHE_IN, BREATHE_OUT]


def test_no_flips_after_unmount(manual_ticker: ManualTicker) -> None:
    oscillator, emitted = _oscillator(manual_ticker)
    oscillator.mount()
    manual_ticker.advance(4.0)
    oscillator.unmount()
    count = len(emitted)

    assert manual_ticker.advance(40.0) == 0
    assert not manual_ticker.is_active
    assert not oscillator.is_mounted
    assert len(emitted) == count


def test_stale_tick_after_unmount_is_ignored(manual_ticker: ManualTicker) -> None:
    oscillator, emitted = _oscillator(manual_ticker)
    oscillator.mount()
    oscillator.unmount()
    oscillator.tick()
    assert oscillator.phase is BreathPhase.IN
    assert len(emitted) == 1


def test_remount_resets_to_breathe_in(manual_ticker: ManualTicker) -> None:
    oscillator, emitted = _oscillator(manual_ticker)
    oscillator.mount()
    manual_ticker.advance(4.0)
    assert oscillator.phase is BreathPhase.OUT
    oscillator.unmount()

    oscillator.mount()
    assert oscillator.phase is BreathPhase.IN
    assert emitted[-1] == (BreathPhase.IN, BREATHE_IN)
    manual_ticker.advance(4.0)
    assert oscillator.phase is BreathPhase.OUT


def test_mount_while_mounted_restarts_from_breathe_in(manual_ticker: ManualTicker) -> None:
    oscillator, _ = _oscillator(manual_ticker)
    oscillator.mount()
    manual_ticker.advance(6.0)
    oscillator.mount()
    assert oscillator.phase is BreathPhase.IN
    manual_ticker.advance(3.0)
    assert oscillator.phase is BreathPhase.IN


def test_custom_interval(manual_ticker: ManualTicker) -> None:
    oscillator, _ = _oscillator(manual_ticker, interval=1.5)
    oscillator.mount()
    manual_ticker.advance(1.5)
    assert oscillator.phase is BreathPhase.OUT


def test_non_positive_interval_rejected(manual_ticker: ManualTicker) -> None:
    with pytest.raises(ValueError):
        BreathOscillator(manual_ticker, interval=0)


def test_unmount_before_mount_is_harmless(manual_ticker: ManualTicker) -> None:
    oscillator, emitted = _oscillator(manual_ticker)
    oscillator.unmount()
    assert emitted == []
    assert not manual_ticker.is_active
