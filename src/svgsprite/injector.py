# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Inject SVG sprite sheets into emitted bundles.

:func:`compute_injections` is the pure core: it groups the SVG modules of a
build, renders one bootstrap payload per group, and returns the updated asset
mapping together with any reportable errors.  :class:`SpriteInjector` adapts
that core to a host compiler's ``emit`` hook.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Final, Protocol

from .config import InjectorOptions, configure
from .errors import AssetNotFoundError
from .grouping import group_by_output, group_for_asset
from .host import CompilationLike, CompilerLike, DoneCallback
from .models import GroupedRequirements, InjectionResult, ModuleRecord
from .payload import generate_payload
from .sources import ConcatSource, RawSource, Source

PLUGIN_NAME: Final[str] = "SpriteInjector"


class InjectorLogger(Protocol):
    """Subset of :class:`svgsprite.cli.shared.CLILogger` used by the injector."""

    def debug(self, message: str) -> None:
        """Emit a debug message."""
        ...


def group_svg_modules(modules: Iterable[ModuleRecord], options: InjectorOptions) -> GroupedRequirements:
    """Return SVG paths grouped by the asset that should receive them."""

    if options.file_name:
        return group_for_asset(modules, options.file_name)
    return group_by_output(modules)


def compute_injections(
    modules: Iterable[ModuleRecord],
    assets: Mapping[str, Source],
    config: InjectorOptions | Mapping[str, Any] | None = None,
    *,
    logger: InjectorLogger | None = None,
) -> InjectionResult:
    """Return ``assets`` with a sprite payload merged into every targeted asset.

    ``assets`` itself is never modified.  Groups whose asset is missing are
    reported as :class:`AssetNotFoundError` unless the group targets the
    configured ``file_name``, in which case a new asset is created.

    Args:
        modules: Module records supplied by the host.
        assets: Existing output assets keyed by file name.
        config: Injector options or a raw mapping of them.
        logger: Optional logger receiving per-asset diagnostics.

    Returns:
        InjectionResult: Updated assets, reportable errors, and injected names.

    Raises:
        OSError: If an SVG file cannot be read.
        SpriteMergeError: If an SVG file is not well-formed.
    """

    options = configure(config)
    updated: dict[str, Source] = dict(assets)
    result = InjectionResult(assets=updated)

    for file_name, svg_file_paths in group_svg_modules(modules, options).items():
        payload = generate_payload(svg_file_paths, options.prefix)
        existing = updated.get(file_name)
        if existing is not None:
            updated[file_name] = ConcatSource(payload, existing)
        elif file_name == options.file_name:
            updated[file_name] = RawSource(payload)
        else:
            result.errors.append(AssetNotFoundError(file_name))
            continue
        result.injected.append(file_name)
        if logger is not None:
            logger.debug(f"injected asset={file_name} icons={len(svg_file_paths)}")
    return result


class SpriteInjector:
    """Compiler plugin adding sprite payloads during asset emission.

    Args:
        options: Injector options or a raw mapping with ``prefix``/``fileName``.
        logger: Optional logger receiving per-asset diagnostics.
    """

    def __init__(
        self,
        options: InjectorOptions | Mapping[str, Any] | None = None,
        *,
        logger: InjectorLogger | None = None,
    ) -> None:
        self.options = configure(options)
        self._logger = logger

    def apply(self, compiler: CompilerLike) -> None:
        """Register :meth:`on_emit` with the compiler's ``emit`` hook."""

        compiler.hooks.emit.tap_async(PLUGIN_NAME, self.on_emit)

    def on_emit(self, compilation: CompilationLike, callback: DoneCallback) -> None:
        """Merge payloads into ``compilation.assets`` and signal completion.

        Reportable errors are appended to ``compilation.errors``.  Any other
        exception is handed to ``callback`` and leaves the assets unchanged.

        Args:
            compilation: Build result whose assets are updated in place.
            callback: Completion callback, invoked once.
        """

        try:
            result = compute_injections(
                compilation.modules,
                compilation.assets,
                self.options,
                logger=self._logger,
            )
        except Exception as exc:  # noqa: BLE001
            callback(exc)
            return
        compilation.assets.update(result.assets)
        compilation.errors.extend(result.errors)
        callback()


__all__ = [
    "InjectorLogger",
    "PLUGIN_NAME",
    "SpriteInjector",
    "compute_injections",
    "group_svg_modules",
]
