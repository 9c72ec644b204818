# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Data structures describing build modules, chunks, and injection results."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from .sources import Source


@runtime_checkable
class ModuleRecord(Protocol):
    """Describe the read-only view of a resolved module supplied by the host.

    Attributes:
        request: Full module request, including any loader chain.
        resolved_path: Absolute path of the file backing the module.
    """

    request: str
    resolved_path: str

    def output_files(self) -> Iterable[str]:
        """Return the output file names of every chunk containing the module.

        Returns:
            Iterable[str]: File names in chunk order.
        """
        ...


@dataclass(frozen=True, slots=True)
class OutputChunk:
    """Output chunk emitted by the host build tool."""

    id: str
    files: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class BuildModule:
    """Concrete :class:`ModuleRecord` built from stats documents or tests."""

    request: str
    resolved_path: str
    chunks: tuple[OutputChunk, ...] = ()

    def output_files(self) -> tuple[str, ...]:
        """Return the distinct file names emitted by the owning chunks.

        Returns:
            tuple[str, ...]: File names in first-seen chunk order.
        """

        seen: dict[str, None] = {}
        for chunk in self.chunks:
            for name in chunk.files:
                seen.setdefault(name, None)
        return tuple(seen)


@dataclass(frozen=True, slots=True)
class SvgRequirement:
    """A single SVG file required by a single output file."""

    svg_file_path: str
    output_file_name: str


GroupedRequirements = dict[str, list[str]]


@dataclass(slots=True)
class InjectionResult:
    """Outcome of :func:`svgsprite.injector.compute_injections`.

    Attributes:
        assets: Asset mapping with payloads merged in.
        errors: Reportable errors collected while processing groups.
        injected: Output file names that received a payload, in processing order.
    """

    assets: Mapping[str, Source]
    errors: list[Exception] = field(default_factory=list)
    injected: list[str] = field(default_factory=list)


__all__ = [
    "BuildModule",
    "GroupedRequirements",
    "InjectionResult",
    "ModuleRecord",
    "OutputChunk",
    "SvgRequirement",
]
