# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Read bundler stats documents into module records and assets.

The expected document is the JSON stats output most bundlers can emit::

    {
      "chunks": [{"id": 0, "files": ["main.js"]}],
      "modules": [
        {"identifier": "svgstore-mini-loader?x!/src/icons/a.svg", "chunks": [0]}
      ],
      "assets": [{"name": "main.js"}, {"name": "sprite.js"}]
    }

Module requests are taken from ``identifier`` (falling back to ``name``).  The
resolved path comes from ``resource`` when present, otherwise from the last
``!``-separated segment of the request with any query string removed.  Asset
names are the chunk files followed by any other entry of ``assets``.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import StatsError
from .models import BuildModule, OutputChunk
from .sources import RawSource, Source

ChunkId = int | str


class ChunkStats(BaseModel):
    """Chunk entry of a stats document."""

    model_config = ConfigDict(extra="ignore")

    id: ChunkId
    files: list[str] = Field(default_factory=list)


class ModuleStats(BaseModel):
    """Module entry of a stats document."""

    model_config = ConfigDict(extra="ignore")

    identifier: str | None = None
    name: str | None = None
    resource: str | None = None
    chunks: list[ChunkId] = Field(default_factory=list)

    @property
    def request(self) -> str:
        """Return the full module request."""

        return self.identifier or self.name or ""

    @property
    def resolved_path(self) -> str:
        """Return the path of the file backing the module."""

        if self.resource:
            return self.resource
        return self.request.rsplit("!", 1)[-1].split("?", 1)[0]


class AssetStats(BaseModel):
    """Emitted asset entry of a stats document."""

    model_config = ConfigDict(extra="ignore")

    name: str


class BuildStats(BaseModel):
    """Top-level stats document."""

    model_config = ConfigDict(extra="ignore")

    modules: list[ModuleStats] = Field(default_factory=list)
    chunks: list[ChunkStats] = Field(default_factory=list)
    assets: list[AssetStats] = Field(default_factory=list)

    def output_files(self) -> list[str]:
        """Return distinct chunk file names followed by the remaining asset names."""

        seen: dict[str, None] = {}
        for chunk in self.chunks:
            for name in chunk.files:
                seen.setdefault(name, None)
        for asset in self.assets:
            seen.setdefault(asset.name, None)
        return list(seen)

    def build_modules(self) -> list[BuildModule]:
        """Return module records with their chunks resolved."""

        chunks = {str(chunk.id): OutputChunk(id=str(chunk.id), files=tuple(chunk.files)) for chunk in self.chunks}
        return [
            BuildModule(
                request=module.request,
                resolved_path=module.resolved_path,
                chunks=tuple(chunks[str(chunk_id)] for chunk_id in module.chunks if str(chunk_id) in chunks),
            )
            for module in self.modules
        ]


def load_stats(path: Path) -> BuildStats:
    """Parse the stats document at ``path``.

    Raises:
        StatsError: If the file cannot be read or does not match the schema.
    """

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise StatsError(f"Unable to read stats file {path}: {exc}") from exc
    try:
        return BuildStats.model_validate(raw)
    except ValidationError as exc:
        raise StatsError(f"Invalid stats file {path}: {exc}") from exc


def load_assets(output_dir: Path, file_names: Iterable[str]) -> dict[str, Source]:
    """Load every existing file of ``file_names`` below ``output_dir``.

    Args:
        output_dir: Directory the bundler wrote its output to.
        file_names: Candidate asset names relative to ``output_dir``.

    Returns:
        dict[str, Source]: Assets keyed by their relative name.
    """

    assets: dict[str, Source] = {}
    for name in file_names:
        candidate = output_dir / name
        if candidate.is_file():
            assets[name] = RawSource(candidate.read_text(encoding="utf-8"))
    return assets


__all__ = ["AssetStats", "BuildStats", "ChunkStats", "ModuleStats", "load_assets", "load_stats"]
