# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console output for sprite injection runs.

All messages go through one cached Rich console per colour/emoji/TTY
combination, so plain status lines and highlighted debug lines share the
same stream and wrapping rules.
"""

from __future__ import annotations

import sys
from functools import lru_cache
from typing import Final, Literal

from rich.console import Console
from rich.text import Text

Level = Literal["info", "ok", "warn", "fail"]

LEVEL_STYLES: Final[dict[Level, tuple[str, str]]] = {
    "info": ("ℹ️ ", "cyan"),
    "ok": ("✅ ", "green"),
    "warn": ("⚠️ ", "yellow"),
    "fail": ("❌ ", "red"),
}


def detect_tty() -> bool:
    """Return ``True`` when stdout appears to be backed by a terminal."""

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


@lru_cache(maxsize=8)
def _build_console(color: bool, emoji: bool, tty: bool) -> Console:
    return Console(
        color_system="auto" if color else None,
        force_terminal=tty,
        no_color=not color,
        emoji=emoji,
        highlight=False,
        soft_wrap=True,
    )


def get_console(*, emoji: bool, color: bool | None = None) -> Console:
    """Return the shared console for the current stdout.

    Args:
        emoji: Whether Rich should render emoji glyphs.
        color: Explicit colour preference. ``None`` enables colour on a TTY.

    Returns:
        Console: Cached console; colour is never enabled off a terminal.
    """

    tty = detect_tty()
    color_enabled = tty if color is None else color and tty
    return _build_console(color_enabled, emoji, tty)


def log(level: Level, msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print ``msg`` with the glyph and colour registered for ``level``."""

    glyph, style = LEVEL_STYLES[level]
    console = get_console(emoji=use_emoji, color=use_color)
    text = Text(f"{glyph if use_emoji else ''}{msg}")
    if console.color_system is not None:
        text.stylize(style)
    console.print(text)


def info(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an informational message."""

    log("info", msg, use_emoji=use_emoji, use_color=use_color)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    log("ok", msg, use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    log("warn", msg, use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an error message."""

    log("fail", msg, use_emoji=use_emoji, use_color=use_color)


__all__ = ["LEVEL_STYLES", "Level", "detect_tty", "fail", "get_console", "info", "log", "ok", "warn"]
