# -*- coding: utf-8 -*-
"""Shared pytest fixtures."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest


SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def default_config() -> dict:
    from zenmaster.config import get_default_config

    return get_default_config()


@pytest.fixture
def profile_store(tmp_path: Path):
    from zenmaster.core.profile_store import ProfileStore

    return ProfileStore(tmp_path / "profile.json")


@pytest.fixture
def manual_ticker():
    from zenmaster.core.ticker import ManualTicker

    return ManualTicker()


@pytest.fixture(scope="session")
def qt_app():
    pytest.importorskip("PyQt6")
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
