# -*- coding: utf-8 -*-
"""Headless commands for breathing, navigation replay and the stored profile."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Any

import typer

from zenmaster.config import ConfigError, load_config, resolve_profile_path
from zenmaster.constants import DEFAULT_SETTINGS_FILE
from zenmaster.core.breath import BreathOscillator
from zenmaster.core.navigator import Navigator
from zenmaster.core.profile_store import ProfileStore
from zenmaster.core.ticker import ManualTicker
from zenmaster.models.breath import BreathKeyframe, BreathPhase
from zenmaster.utils.logger import get_logger

app = typer.Typer(help="ZenMaster command line tools")
profile_app = typer.Typer(help="Inspect or reset the stored user profile")
app.add_typer(profile_app, name="profile")
logger = logging.getLogger(__name__)


def _load_settings(settings: Path, verbose: bool = False) -> dict[str, Any]:
    if verbose:
        get_logger("zenmaster")
    try:
        return load_config(settings)
    except (ConfigError, OSError, ValueError) as e:
        typer.echo(f"Failed to load settings from {settings}: {e}", err=True)
        raise typer.Exit(1)


def _profile_store(settings_path: Path) -> ProfileStore:
    settings = _load_settings(settings_path)
    return ProfileStore(resolve_profile_path(settings, settings_path))


@app.command()
def breathe(
    cycles: int = typer.Option(3, min=1, help="Number of full in/out cycles"),
    interval: float = typer.Option(None, help="Seconds per phase (default: from settings)"),
    realtime: bool = typer.Option(False, help="Sleep one interval before each simulated tick to pace the output"),
    settings: Path = typer.Option(Path(DEFAULT_SETTINGS_FILE), help="Settings JSON path"),
    verbose: bool = typer.Option(False, help="Verbose output"),
) -> None:
    """Print breathing keyframes as the zen screen would receive them."""
    config = _load_settings(settings, verbose)
    if interval is None:
        interval = float(config["breathing"]["interval_seconds"])
    if interval <= 0:
        typer.echo("Interval must be positive", err=True)
        raise typer.Exit(1)

    ticker = ManualTicker()
    elapsed = 0.0

    def _print_keyframe(phase: BreathPhase, keyframe: BreathKeyframe) -> None:
        typer.echo(
            f"[{elapsed:6.1f}s] {keyframe.label:<12} scale={keyframe.scale:.2f} opacity={keyframe.opacity:.2f}"
        )

    oscillator = BreathOscillator(ticker, interval=interval, on_keyframe=_print_keyframe)
    oscillator.mount()
    try:
        for _ in range(cycles * 2):
            if realtime:
                time.sleep(interval)
            elapsed += interval
            ticker.advance(interval)
    except KeyboardInterrupt:
        typer.echo("Interrupted")
    finally:
        oscillator.unmount()


@app.command()
def navigate(
    widths: list[float] = typer.Argument(..., help="Drag widths, negative for left. Put -- before negative values."),
    threshold: float = typer.Option(None, help="Swipe threshold (default: from settings)"),
    settings: Path = typer.Option(Path(DEFAULT_SETTINGS_FILE), help="Settings JSON path"),
) -> None:
    """Replay drags from the title screen and print the screen after each."""
    config = _load_settings(settings)
    if threshold is None:
        threshold = float(config["navigation"]["swipe_threshold"])
    navigator = Navigator(threshold=threshold)

    typer.echo(f"start: {navigator.current().value}")
    for width in widths:
        direction = navigator.classify_swipe(width)
        screen = navigator.handle_drag(width)
        move = direction.value if direction is not None else "ignored"
        typer.echo(f"{width:+.0f} ({move}): {screen.value}")


@profile_app.command("show")
def profile_show(
    settings: Path = typer.Option(Path(DEFAULT_SETTINGS_FILE), help="Settings JSON path"),
) -> None:
    """Print the stored profile fields."""
    store = _profile_store(settings)
    profile = store.load()
    if profile.is_empty():
        typer.echo(f"No profile stored in {store.path}")
        return
    typer.echo(f"Name:  {profile.name}")
    typer.echo(f"Age:   {profile.age}")
    typer.echo(f"Phone: {profile.phone}")


@profile_app.command("clear")
def profile_clear(
    settings: Path = typer.Option(Path(DEFAULT_SETTINGS_FILE), help="Settings JSON path"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
) -> None:
    """Remove the stored profile fields."""
    store = _profile_store(settings)
    if not yes:
        typer.confirm(f"Clear profile stored in {store.path}?", abort=True)
    store.clear()
    logger.info("Cleared profile in %s", store.path)
    typer.echo("Profile cleared")


if __name__ == "__main__":
    app()
