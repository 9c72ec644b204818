# SPDX-License-Identifier: MIT
"""Data structures for the ``inject`` CLI command."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Any

import typer

STATS_OPTION = Annotated[
    Path,
    typer.Option("--stats", "-s", help="Bundler stats JSON document.", exists=True, dir_okay=False),
]
OUTPUT_DIR_OPTION = Annotated[
    Path,
    typer.Option("--output-dir", "-o", help="Directory containing the emitted assets.", file_okay=False),
]
PREFIX_OPTION = Annotated[
    str | None,
    typer.Option("--prefix", help="Prefix prepended to every icon identifier."),
]
FILE_NAME_OPTION = Annotated[
    str | None,
    typer.Option("--file-name", help="Inject every icon into this single asset."),
]
ROOT_OPTION = Annotated[
    Path,
    typer.Option("--root", "-r", help="Project root holding pyproject.toml."),
]
DRY_RUN_OPTION = Annotated[
    bool,
    typer.Option("--dry-run", help="Show actions without modifying files."),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji output."),
]
DEBUG_OPTION = Annotated[
    bool,
    typer.Option("--debug", help="Print per-asset diagnostics."),
]


@dataclass(slots=True)
class InjectCLIOptions:
    """Capture CLI options for sprite injection."""

    stats: Path
    output_dir: Path
    root: Path
    prefix: str | None
    file_name: str | None
    dry_run: bool
    emoji: bool
    debug: bool

    @classmethod
    def from_cli(
        cls,
        stats: Path,
        output_dir: Path,
        root: Path,
        *,
        prefix: str | None,
        file_name: str | None,
        dry_run: bool,
        emoji: bool,
        debug: bool,
    ) -> "InjectCLIOptions":
        """Return options parsed from CLI arguments."""

        return cls(
            stats=stats.resolve(),
            output_dir=output_dir.resolve(),
            root=root.resolve(),
            prefix=prefix,
            file_name=file_name,
            dry_run=dry_run,
            emoji=emoji,
            debug=debug,
        )

    def overrides(self) -> dict[str, Any]:
        """Return injector option overrides supplied on the command line."""

        return {"prefix": self.prefix, "file_name": self.file_name}


__all__ = [
    "DEBUG_OPTION",
    "DRY_RUN_OPTION",
    "EMOJI_OPTION",
    "FILE_NAME_OPTION",
    "InjectCLIOptions",
    "OUTPUT_DIR_OPTION",
    "PREFIX_OPTION",
    "ROOT_OPTION",
    "STATS_OPTION",
]
