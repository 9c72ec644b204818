# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Map SVG modules to the output files that require them.

Modules are recognised by the loader marker embedded in their request.  Every
matching module produces one :class:`SvgRequirement` per JavaScript output it
belongs to; duplicate pairs collapse to the first occurrence so each icon is
emitted at most once per output, in first-seen order.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Final

from .models import GroupedRequirements, ModuleRecord, SvgRequirement

LOADER_MARKER: Final[str] = "svgstore-mini-loader"
LOADER_MARKER_PATTERN: Final[re.Pattern[str]] = re.compile(rf"{re.escape(LOADER_MARKER)}.+!", re.IGNORECASE)
SCRIPT_OUTPUT_PATTERN: Final[re.Pattern[str]] = re.compile(r"\.js$")


def is_svg_module(module: ModuleRecord) -> bool:
    """Return ``True`` when ``module`` was requested through the sprite loader.

    Args:
        module: Module record supplied by the host.

    Returns:
        bool: Whether the request carries the loader marker.
    """

    request = getattr(module, "request", None)
    return isinstance(request, str) and LOADER_MARKER_PATTERN.search(request) is not None


def collect_requirements(modules: Iterable[ModuleRecord]) -> list[SvgRequirement]:
    """Return distinct ``(svg, output)`` pairs for every marked module.

    Args:
        modules: Module records in host order.

    Returns:
        list[SvgRequirement]: Deduplicated requirements in first-seen order.
    """

    requirements: dict[SvgRequirement, None] = {}
    for module in modules:
        if not is_svg_module(module):
            continue
        for file_name in module.output_files():
            if SCRIPT_OUTPUT_PATTERN.search(file_name) is None:
                continue
            requirements.setdefault(SvgRequirement(module.resolved_path, file_name), None)
    return list(requirements)


def group_requirements(requirements: Iterable[SvgRequirement]) -> GroupedRequirements:
    """Group requirements by output file name.

    Args:
        requirements: Requirement pairs, possibly containing duplicates.

    Returns:
        GroupedRequirements: Output file name mapped to distinct SVG paths.
    """

    grouped: GroupedRequirements = {}
    for requirement in requirements:
        paths = grouped.setdefault(requirement.output_file_name, [])
        if requirement.svg_file_path not in paths:
            paths.append(requirement.svg_file_path)
    return grouped


def group_by_output(modules: Iterable[ModuleRecord]) -> GroupedRequirements:
    """Return SVG paths grouped by the output files of their modules."""

    return group_requirements(collect_requirements(modules))


def group_for_asset(modules: Iterable[ModuleRecord], file_name: str) -> GroupedRequirements:
    """Return every marked module's SVG path grouped under ``file_name``.

    Chunk membership is ignored; only the resolved paths are deduplicated.

    Args:
        modules: Module records in host order.
        file_name: Name of the asset receiving all icons.

    Returns:
        GroupedRequirements: Single-entry mapping, empty when nothing matched.
    """

    paths: dict[str, None] = {}
    for module in modules:
        if is_svg_module(module):
            paths.setdefault(module.resolved_path, None)
    if not paths:
        return {}
    return {file_name: list(paths)}


__all__ = [
    "LOADER_MARKER",
    "LOADER_MARKER_PATTERN",
    "SCRIPT_OUTPUT_PATTERN",
    "collect_requirements",
    "group_by_output",
    "group_for_asset",
    "group_requirements",
    "is_svg_module",
]
