# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for icon naming and bootstrap script generation."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from svgsprite.payload import (
    BODY_NOT_FOUND_MESSAGE,
    bootstrap_script,
    generate_payload,
    generate_sprites,
    icon_identifier,
    read_icons,
)


def test_identifier_applies_prefix() -> None:
    assert icon_identifier("/a/b/foo.svg", "ico-") == "ico-foo"
    assert icon_identifier("/a/b/icon-foo.svg", "ico-") == "ico-icon-foo"
    assert icon_identifier("/a/b/foo.svg") == "foo"


def test_identifier_strips_only_trailing_suffix() -> None:
    assert icon_identifier("/a/foo.svg.svg") == "foo.svg"
    assert icon_identifier("/a/foo.SVG") == "foo.SVG"


def test_bootstrap_script_embeds_string_literal() -> None:
    sprites = '<svg a="1" b=\'2\'>\\ </svg>'
    script = bootstrap_script(sprites)

    assert script.startswith('!function(e){var n=e.querySelector("body");')
    assert script.endswith("}(document);")
    assert json.dumps(BODY_NOT_FOUND_MESSAGE) in script
    literal = script[script.index('"afterbegin",') + len('"afterbegin",') : -len(")}(document);")]
    assert json.loads(literal) == sprites


def test_bootstrap_script_keeps_non_ascii() -> None:
    assert "é" in bootstrap_script("<svg><title>café</title></svg>")


def test_read_icons_uses_prefix(icons_dir: Path) -> None:
    icons = read_icons([str(icons_dir / "a.svg")], "ico-")
    assert icons[0][0] == "ico-a"
    assert icons[0][1].startswith("<svg")


def test_generated_sprite_is_hidden(icons_dir: Path) -> None:
    sprites = generate_sprites([str(icons_dir / "a.svg"), str(icons_dir / "b.svg")])
    assert 'display="none"' in sprites
    assert sprites.index('id="a"') < sprites.index('id="b"')


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        generate_payload([str(tmp_path / "nope.svg")])
