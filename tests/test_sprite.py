# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the sprite sheet builder."""

from __future__ import annotations

import pytest
from lxml import etree

from svgsprite.errors import SpriteMergeError
from svgsprite.sprite import SVG_NS, SpriteStore, merge_sprites

from .factories import ICON_MARKUP

NS = {"svg": SVG_NS}


def _parse(markup: str) -> etree._Element:
    return etree.fromstring(markup.encode("utf-8"))


def test_icons_become_symbols_in_order() -> None:
    sprite = _parse(merge_sprites([("b", ICON_MARKUP["b"]), ("a", ICON_MARKUP["a"])]))

    assert sprite.tag == f"{{{SVG_NS}}}svg"
    symbols = sprite.findall("svg:symbol", NS)
    assert [symbol.get("id") for symbol in symbols] == ["b", "a"]
    assert symbols[0].get("viewBox") == "0 0 16 16"
    assert symbols[0].find("svg:circle", NS) is not None
    assert symbols[1].find("svg:path", NS).get("d") == "M0 0h24v24H0z"


def test_root_attributes_are_applied() -> None:
    sprite = _parse(merge_sprites([("a", ICON_MARKUP["a"])], root_attrs={"display": "none"}))
    assert sprite.get("display") == "none"


def test_defs_are_hoisted_to_sprite_defs() -> None:
    markup = (
        '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 10 10" role="img">'
        '<defs><linearGradient id="g"/></defs><rect fill="url(#g)"/></svg>'
    )
    sprite = _parse(merge_sprites([("grad", markup)]))

    children = list(sprite)
    assert children[0].tag == f"{{{SVG_NS}}}defs"
    assert children[0].find("svg:linearGradient", NS).get("id") == "g"
    symbol = sprite.find("svg:symbol", NS)
    assert symbol.get("role") == "img"
    assert symbol.find("svg:defs", NS) is None
    assert symbol.find("svg:rect", NS) is not None


def test_unnamespaced_icons_are_treated_as_svg() -> None:
    sprite = _parse(merge_sprites([("c", ICON_MARKUP["c"])]))
    symbol = sprite.find("svg:symbol", NS)
    assert symbol.find("svg:rect", NS) is not None


def test_inline_flag_controls_prologue() -> None:
    inline = merge_sprites([("a", ICON_MARKUP["a"])])
    standalone = merge_sprites([("a", ICON_MARKUP["a"])], inline=False)

    assert inline.startswith("<svg")
    assert standalone.startswith("<?xml")
    assert "<!DOCTYPE svg" in standalone


def test_store_tracks_identifiers() -> None:
    store = SpriteStore().add("a", ICON_MARKUP["a"]).add("b", ICON_MARKUP["b"])
    assert store.ids == ("a", "b")
    assert str(store) == store.to_string()


def test_malformed_markup_raises() -> None:
    with pytest.raises(SpriteMergeError, match="broken"):
        merge_sprites([("broken", "<svg><path></svg>")])


def test_mixed_content_whitespace_is_preserved() -> None:
    markup = (
        '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 16 16">'
        "<text><tspan>a</tspan> <tspan>b</tspan></text></svg>"
    )
    sprite = merge_sprites([("label", markup)])
    assert "<tspan>a</tspan> <tspan>b</tspan>" in sprite


def test_internal_entities_are_expanded() -> None:
    markup = (
        '<?xml version="1.0"?>\n'
        '<!DOCTYPE svg [<!ENTITY st0 "fill:red">]>\n'
        '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 16 16"><path style="&st0;" d="M0 0h16v16H0z"/></svg>'
    )
    sprite = _parse(merge_sprites([("red", markup)]))
    path = sprite.find("svg:symbol/svg:path", NS)
    assert path is not None
    assert path.get("style") == "fill:red"
