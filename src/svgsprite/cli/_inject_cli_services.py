# SPDX-License-Identifier: MIT
"""Helper services used by the ``inject`` CLI command."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..config import ConfigError, InjectorOptions, load_pyproject_options
from ..errors import StatsError
from ..host import BuildCompiler, Compilation
from ..injector import SpriteInjector
from ..stats import load_assets, load_stats
from ._inject_cli_models import InjectCLIOptions
from .shared import CLIError, CLILogger


@dataclass(slots=True)
class InjectOutcome:
    """Summary of an injection run."""

    written: list[str] = field(default_factory=list)
    errors: list[Exception] = field(default_factory=list)


def resolve_options(options: InjectCLIOptions) -> InjectorOptions:
    """Merge ``[tool.svgsprite]`` project settings with CLI overrides.

    Raises:
        CLIError: If ``pyproject.toml`` cannot be parsed.
    """

    try:
        base = load_pyproject_options(options.root)
    except ConfigError as exc:
        raise CLIError(str(exc)) from exc
    return base.merged(options.overrides())


def asset_candidates(file_names: list[str], injector_options: InjectorOptions) -> list[str]:
    """Return asset names to load, including the configured single target."""

    candidates = list(file_names)
    if injector_options.file_name and injector_options.file_name not in candidates:
        candidates.append(injector_options.file_name)
    return candidates


def perform_injection(options: InjectCLIOptions, *, logger: CLILogger) -> InjectOutcome:
    """Run the sprite injector against the build described by ``options``.

    Args:
        options: Normalized CLI options containing paths and runtime flags.
        logger: Logger used to emit user-facing messages.

    Returns:
        InjectOutcome: Assets written (or planned) and reportable errors.

    Raises:
        CLIError: Raised when the stats file is invalid or emission aborts.
    """

    injector_options = resolve_options(options)
    try:
        stats = load_stats(options.stats)
    except StatsError as exc:
        logger.fail(str(exc))
        raise CLIError(str(exc)) from exc

    compilation = Compilation(
        modules=list(stats.build_modules()),
        assets=load_assets(options.output_dir, asset_candidates(stats.output_files(), injector_options)),
    )
    original = dict(compilation.assets)
    logger.debug(f"modules={len(compilation.modules)} assets={len(original)}")

    compiler = BuildCompiler()
    SpriteInjector(injector_options, logger=logger).apply(compiler)
    error = compiler.emit(compilation)
    if error is not None:
        message = f"Sprite injection failed: {error}"
        logger.fail(message)
        raise CLIError(message) from error

    outcome = InjectOutcome(errors=list(compilation.errors))
    for name, asset in compilation.assets.items():
        if original.get(name) is asset:
            continue
        outcome.written.append(name)
        if options.dry_run:
            continue
        destination = options.output_dir / name
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(asset.source(), encoding="utf-8")
    return outcome


def emit_inject_summary(outcome: InjectOutcome, options: InjectCLIOptions, *, logger: CLILogger) -> None:
    """Report written assets and collected errors."""

    for error in outcome.errors:
        logger.fail(str(error))
    if not outcome.written:
        logger.info("No assets required sprite injection")
        return
    names = ", ".join(outcome.written)
    if options.dry_run:
        logger.warn(f"DRY RUN: would update {names}")
    else:
        logger.ok(f"Injected sprites into {names}")


__all__ = ["InjectOutcome", "asset_candidates", "emit_inject_summary", "perform_injection", "resolve_options"]
