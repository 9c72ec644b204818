# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Exceptions raised while generating and injecting sprite sheets."""

from __future__ import annotations


class SpriteInjectorError(RuntimeError):
    """Base class for errors raised by the sprite injector."""


class SpriteMergeError(SpriteInjectorError):
    """Raised when an icon cannot be merged into the sprite sheet."""


class AssetNotFoundError(SpriteInjectorError):
    """Reported when a group targets an output asset that does not exist."""

    def __init__(self, asset_name: str) -> None:
        """Create the error for the missing ``asset_name``.

        Args:
            asset_name: Output file name that had no matching asset.
        """

        super().__init__(f"Asset {asset_name} not found")
        self.asset_name = asset_name


class StatsError(SpriteInjectorError):
    """Raised when a build stats document cannot be read or interpreted."""


__all__ = ("AssetNotFoundError", "SpriteInjectorError", "SpriteMergeError", "StatsError")
