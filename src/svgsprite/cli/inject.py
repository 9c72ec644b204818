# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command injecting sprite sheets into emitted assets."""

from __future__ import annotations

from pathlib import Path

import typer

from ._inject_cli_models import (
    DEBUG_OPTION,
    DRY_RUN_OPTION,
    EMOJI_OPTION,
    FILE_NAME_OPTION,
    OUTPUT_DIR_OPTION,
    PREFIX_OPTION,
    ROOT_OPTION,
    STATS_OPTION,
    InjectCLIOptions,
)
from ._inject_cli_services import emit_inject_summary, perform_injection
from .shared import CLIError, build_cli_logger


def inject_command(
    stats: STATS_OPTION,
    output_dir: OUTPUT_DIR_OPTION,
    prefix: PREFIX_OPTION = None,
    file_name: FILE_NAME_OPTION = None,
    root: ROOT_OPTION = Path("."),
    dry_run: DRY_RUN_OPTION = False,
    emoji: EMOJI_OPTION = True,
    debug: DEBUG_OPTION = False,
) -> None:
    """Inject SVG sprite sheets into the assets listed in a stats document."""

    options = InjectCLIOptions.from_cli(
        stats,
        output_dir,
        root,
        prefix=prefix,
        file_name=file_name,
        dry_run=dry_run,
        emoji=emoji,
        debug=debug,
    )
    logger = build_cli_logger(emoji=options.emoji, debug=options.debug)
    try:
        outcome = perform_injection(options, logger=logger)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc

    emit_inject_summary(outcome, options, logger=logger)
    raise typer.Exit(code=1 if outcome.errors else 0)


__all__ = ["inject_command"]
