# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core package metadata and convenience exports."""

from __future__ import annotations

from importlib import metadata

from .config import InjectorOptions, configure
from .injector import SpriteInjector, compute_injections

__all__ = ["InjectorOptions", "SpriteInjector", "__version__", "compute_injections", "configure"]

try:
    __version__ = metadata.version("svgsprite-injector")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
