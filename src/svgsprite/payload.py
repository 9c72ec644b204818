# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build the sprite sheet for a group of icons and wrap it in a bootstrap script."""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import PurePath
from typing import Final

from .sprite import HIDDEN_ROOT_ATTRIBUTES, merge_sprites

SVG_SUFFIX: Final[str] = ".svg"
BODY_NOT_FOUND_MESSAGE: Final[str] = "svgsprite: Could not find element: body"


def icon_identifier(svg_file_path: str, prefix: str = "") -> str:
    """Return the symbol identifier for ``svg_file_path``.

    Args:
        svg_file_path: Path of the SVG file.
        prefix: Text prepended to the identifier.

    Returns:
        str: ``prefix`` followed by the basename without a trailing ``.svg``.
    """

    name = PurePath(svg_file_path).name
    if name.endswith(SVG_SUFFIX):
        name = name[: -len(SVG_SUFFIX)]
    return f"{prefix}{name}"


def read_icons(svg_file_paths: Sequence[str], prefix: str = "") -> list[tuple[str, str]]:
    """Read each SVG file and pair its content with its identifier.

    Raises:
        OSError: If a file cannot be read.
    """

    icons: list[tuple[str, str]] = []
    for svg_file_path in svg_file_paths:
        with open(svg_file_path, encoding="utf-8") as handle:
            icons.append((icon_identifier(svg_file_path, prefix), handle.read()))
    return icons


def generate_sprites(svg_file_paths: Sequence[str], prefix: str = "") -> str:
    """Return a hidden sprite sheet containing every file in ``svg_file_paths``."""

    return merge_sprites(read_icons(svg_file_paths, prefix), root_attrs=HIDDEN_ROOT_ATTRIBUTES)


def bootstrap_script(sprites: str) -> str:
    """Wrap ``sprites`` in a script that inserts it at the top of ``<body>``.

    Args:
        sprites: Sprite sheet markup.

    Returns:
        str: Self-invoking script fragment with ``sprites`` as a string literal.
    """

    literal = json.dumps(sprites, ensure_ascii=False)
    message = json.dumps(BODY_NOT_FOUND_MESSAGE)
    return (
        '!function(e){var n=e.querySelector("body");'
        f"if(!n)throw new Error({message});"
        f'n.insertAdjacentHTML("afterbegin",{literal})}}(document);'
    )


def generate_payload(svg_file_paths: Sequence[str], prefix: str = "") -> str:
    """Return the bootstrap script for ``svg_file_paths``."""

    return bootstrap_script(generate_sprites(svg_file_paths, prefix))


__all__ = [
    "BODY_NOT_FOUND_MESSAGE",
    "bootstrap_script",
    "generate_payload",
    "generate_sprites",
    "icon_identifier",
    "read_icons",
]
