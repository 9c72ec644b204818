# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from .factories import ICON_MARKUP


@pytest.fixture
def icons_dir(tmp_path: Path) -> Path:
    """Return a directory holding ``a.svg``, ``b.svg`` and ``c.svg``."""

    directory = tmp_path / "icons"
    directory.mkdir()
    for name, markup in ICON_MARKUP.items():
        (directory / f"{name}.svg").write_text(markup, encoding="utf-8")
    return directory
