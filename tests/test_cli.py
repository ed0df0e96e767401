# -*- coding: utf-8 -*-
"""Tests for the command line tools."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from zenmaster.cli.zen_cli import app
from zenmaster.core.profile_store import ProfileStore
from zenmaster.models.user_profile import UserProfile


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def settings_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.json"


def test_breathe_prints_alternating_keyframes(runner: CliRunner, settings_path: Path) -> None:
    result = runner.invoke(app, ["breathe", "--cycles", "1", "--settings", str(settings_path)])
    assert result.exit_code == 0, result.output
    lines = result.output.strip().splitlines()
    assert len(lines) == 3
    assert "Breathe in" in lines[0] and "scale=1.20" in lines[0] and "opacity=1.00" in lines[0]
    assert "Breathe out" in lines[1] and "scale=0.80" in lines[1] and "opacity=0.95" in lines[1]
    assert "Breathe in" in lines[2]
    assert "4.0s" in lines[1]


def test_breathe_uses_interval_from_settings(runner: CliRunner, settings_path: Path) -> None:
    settings_path.write_text(json.dumps({"breathing": {"interval_seconds": 2}}), encoding="utf-8")
    result = runner.invoke(app, ["breathe", "--cycles", "1", "--settings", str(settings_path)])
    assert result.exit_code == 0, result.output
    assert "2.0s" in result.output.splitlines()[1]


def test_breathe_rejects_non_positive_interval(runner: CliRunner, settings_path: Path) -> None:
    result = runner.invoke(app, ["breathe", "--interval", "0", "--settings", str(settings_path)])
    assert result.exit_code == 1


def test_invalid_settings_exit_with_error(runner: CliRunner, settings_path: Path) -> None:
    settings_path.write_text(json.dumps({"breathing": {"interval_seconds": -1}}), encoding="utf-8")
    result = runner.invoke(app, ["breathe", "--settings", str(settings_path)])
    assert result.exit_code == 1


def test_navigate_replays_drags(runner: CliRunner, settings_path: Path) -> None:
    result = runner.invoke(app, ["navigate", "--settings", str(settings_path), "--", "-60", "-30", "-60", "-60", "70"])
    assert result.exit_code == 0, result.output
    lines = result.output.strip().splitlines()
    assert lines[0] == "start: title"
    assert lines[1].endswith("(left): login")
    assert lines[2].endswith("(ignored): login")
    assert lines[3].endswith("(left): welcome")
    assert lines[4].endswith("(left): zen")
    assert lines[5].endswith("(right): welcome")


def test_profile_show_empty(runner: CliRunner, settings_path: Path) -> None:
    result = runner.invoke(app, ["profile", "show", "--settings", str(settings_path)])
    assert result.exit_code == 0
    assert "No profile stored" in result.output


def test_profile_show_and_clear(runner: CliRunner, settings_path: Path) -> None:
    store = ProfileStore(settings_path.parent / "profile.json")
    store.save(UserProfile(name="Ann", age="30", phone="555"))

    shown = runner.invoke(app, ["profile", "show", "--settings", str(settings_path)])
    assert "Name:  Ann" in shown.output
    assert "Phone: 555" in shown.output

    cleared = runner.invoke(app, ["profile", "clear", "--yes", "--settings", str(settings_path)])
    assert cleared.exit_code == 0
    assert store.load().is_empty()


def test_profile_clear_can_be_aborted(runner: CliRunner, settings_path: Path) -> None:
    store = ProfileStore(settings_path.parent / "profile.json")
    store.save(UserProfile(name="Ann"))
    result = runner.invoke(app, ["profile", "clear", "--settings", str(settings_path)], input="n\n")
    assert result.exit_code != 0
    assert store.load().name == "Ann"


def test_breathe_realtime_sleeps_once_per_tick(runner: CliRunner, settings_path: Path, monkeypatch) -> None:
    from zenmaster.cli import zen_cli

    sleeps: list[float] = []
    monkeypatch.setattr(zen_cli.time, "sleep", sleeps.append)
    result = runner.invoke(
        app, ["breathe", "--cycles", "2", "--interval", "1.5", "--realtime", "--settings", str(settings_path)]
    )
    assert result.exit_code == 0, result.output
    assert sleeps == [1.5, 1.5, 1.5, 1.5]
    assert len(result.output.strip().splitlines()) == 5


def test_breathe_help_describes_realtime_pacing(runner: CliRunner) -> None:
    result = runner.invoke(app, ["breathe", "--help"])
    assert result.exit_code == 0
    assert "simulated" in result.output
