# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for SVG module grouping."""

from __future__ import annotations

from svgsprite.grouping import (
    collect_requirements,
    group_by_output,
    group_for_asset,
    group_requirements,
    is_svg_module,
)
from svgsprite.models import BuildModule, OutputChunk, SvgRequirement

from .factories import plain_module, svg_module


def test_marker_matches_case_insensitively() -> None:
    assert is_svg_module(svg_module("/i/a.svg", "main.js"))
    assert is_svg_module(svg_module("/i/a.svg", "main.js", loader="SVGSTORE-MINI-LOADER?x"))
    assert not is_svg_module(plain_module("/i/a.svg", "main.js"))


def test_marker_requires_separator_after_token() -> None:
    module = BuildModule(request="svgstore-mini-loader!/i/a.svg", resolved_path="/i/a.svg")
    assert not is_svg_module(module)


def test_duplicate_pairs_collapse() -> None:
    modules = [
        svg_module("/i/a.svg", "main.js"),
        svg_module("/i/a.svg", "main.js"),
        svg_module("/i/b.svg", "main.js"),
    ]
    assert collect_requirements(modules) == [
        SvgRequirement("/i/a.svg", "main.js"),
        SvgRequirement("/i/b.svg", "main.js"),
    ]
    assert group_by_output(modules) == {"main.js": ["/i/a.svg", "/i/b.svg"]}


def test_grouping_preserves_first_seen_order() -> None:
    modules = [
        svg_module("/i/c.svg", "main.js"),
        svg_module("/i/a.svg", "main.js", "admin.js"),
        svg_module("/i/b.svg", "admin.js"),
        svg_module("/i/c.svg", "admin.js"),
    ]
    assert group_by_output(modules) == {
        "main.js": ["/i/c.svg", "/i/a.svg"],
        "admin.js": ["/i/a.svg", "/i/b.svg", "/i/c.svg"],
    }


def test_grouping_is_idempotent() -> None:
    modules = [svg_module("/i/a.svg", "main.js"), svg_module("/i/b.svg", "vendor.js")]
    pairs = collect_requirements(modules)
    assert group_requirements(pairs) == group_requirements(pairs)
    assert group_requirements(pairs) == group_requirements(pairs + pairs)


def test_only_script_outputs_are_targeted() -> None:
    module = BuildModule(
        request="svgstore-mini-loader?x!/i/a.svg",
        resolved_path="/i/a.svg",
        chunks=(OutputChunk(id="0", files=("main.css", "main.js", "main.js.map")),),
    )
    assert group_by_output([module]) == {"main.js": ["/i/a.svg"]}


def test_group_for_asset_ignores_chunks() -> None:
    modules = [
        svg_module("/i/a.svg", "main.js"),
        svg_module("/i/b.svg"),
        svg_module("/i/a.svg", "vendor.js"),
        plain_module("/i/c.svg", "main.js"),
    ]
    assert group_for_asset(modules, "sprite.js") == {"sprite.js": ["/i/a.svg", "/i/b.svg"]}


def test_no_matching_modules_yield_no_groups() -> None:
    modules = [plain_module("/src/index.js", "main.js")]
    assert group_by_output(modules) == {}
    assert group_for_asset(modules, "sprite.js") == {}
    assert group_by_output([]) == {}
