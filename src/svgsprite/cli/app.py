# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands."""

from __future__ import annotations

import typer

from .inject import inject_command

app = typer.Typer(
    name="svgsprite",
    help="Inject SVG sprite sheets into bundler output.",
    no_args_is_help=True,
    add_completion=False,
)
app.command("inject")(inject_command)


@app.callback()
def main() -> None:
    """Inject SVG sprite sheets into bundler output."""


__all__ = ["app"]
