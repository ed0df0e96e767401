# -*- coding: utf-8 -*-
"""CLI module entry point for `python -m zenmaster.gui`."""

from __future__ import annotations

from zenmaster.main import main


if __name__ == "__main__":
    raise SystemExit(main())
