# -*- coding: utf-8 -*-
"""Cancellable periodic tickers."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol


TickCallback = Callable[[], None]


class Ticker(Protocol):
    """A repeating timer that can be started and cancelled."""

    @property
    def is_active(self) -> bool: ...

    def start(self, interval: float, callback: TickCallback) -> None: ...

    def stop(self) -> None: ...


class ManualTicker:
    """Ticker driven by simulated time instead of a wall clock."""

    def __init__(self) -> None:
        self._interval = 0.0
        self._callback: TickCallback | None = None
        self._elapsed = 0.0

    @property
    def is_active(self) -> bool:
        return self._callback is not None

    @property
    def interval(self) -> float:
        return self._interval

    def start(self, interval: float, callback: TickCallback) -> None:
        if interval <= 0:
            raise ValueError(f"Ticker interval must be positive, got {interval}")
        self._interval = float(interval)
        self._callback = callback
        self._elapsed = 0.0

    def stop(self) -> None:
        self._callback = None
        self._elapsed = 0.0

    def advance(self, seconds: float) -> int:
        """Move simulated time forward and fire once per full interval.

        Returns the number of ticks fired. A callback that stops the ticker
        ends the advance early.
        """
        if self._callback is None:
            return 0
        self._elapsed += seconds
        fired = 0
        while self._callback is not None and self._elapsed >= self._interval:
            self._elapsed -= self._interval
            fired += 1
            self._callback()
        return fired
