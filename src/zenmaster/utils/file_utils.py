# -*- coding: utf-8 -*-
"""JSON file helpers with UTF-8 defaults."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any


def ensure_dir(path: str | Path) -> Path:
    """Create a directory if it does not exist."""
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def read_json_file(path: str | Path) -> dict[str, Any]:
    """Read a JSON object from a file."""
    file_path = Path(path)
    with file_path.open("r", encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, dict):
        raise ValueError(f"Expected JSON object in {file_path}")
    return data


def write_json_file(path: str | Path, data: dict[str, Any]) -> Path:
    """Write a JSON object, replacing the target only once fully written."""
    file_path = Path(path)
    ensure_dir(file_path.parent)
    tmp_path = file_path.with_name(file_path.name + ".tmp")
    with tmp_path.open("w", encoding="utf-8") as handle:
        json.dump(data, handle, indent=2, ensure_ascii=False)
        handle.write("\n")
    os.replace(tmp_path, file_path)
    return file_path
