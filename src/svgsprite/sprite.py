# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Combine individual SVG documents into a single ``<symbol>`` sprite sheet.

Every icon becomes a ``<symbol>`` whose ``id`` is the caller-supplied
identifier.  Presentation attributes that only make sense on the outer
document (``viewBox`` and the accessibility attributes) are carried over to
the symbol, ``<defs>`` content is hoisted into a shared ``<defs>`` element at
the top of the sprite, and everything else moves into the symbol unchanged.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Final

from lxml import etree

from .errors import SpriteMergeError

SVG_NS: Final[str] = "http://www.w3.org/2000/svg"
XLINK_NS: Final[str] = "http://www.w3.org/1999/xlink"
SYMBOL_ATTRIBUTES: Final[tuple[str, ...]] = ("viewBox", "preserveAspectRatio", "aria-labelledby", "role")
HIDDEN_ROOT_ATTRIBUTES: Final[Mapping[str, str]] = {"display": "none"}
XML_PROLOGUE: Final[str] = (
    '<?xml version="1.0" encoding="UTF-8"?>'
    '<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN" "http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">'
)

_PARSER = etree.XMLParser(resolve_entities=True, load_dtd=False, no_network=True)


def _svg_tag(name: str) -> str:
    return f"{{{SVG_NS}}}{name}"


def _adopt_svg_namespace(root: etree._Element) -> None:
    """Move un-namespaced elements of an icon into the SVG namespace."""

    for element in root.iter():
        tag = element.tag
        if isinstance(tag, str) and not tag.startswith("{"):
            element.tag = _svg_tag(tag)


class SpriteStore:
    """Accumulate icons and serialise them as one sprite sheet.

    Args:
        root_attrs: Attributes applied to the outer ``<svg>`` element.
        inline: When ``False`` the XML declaration and doctype are emitted.
    """

    def __init__(self, *, root_attrs: Mapping[str, str] | None = None, inline: bool = True) -> None:
        self._root = etree.Element(_svg_tag("svg"), nsmap={None: SVG_NS, "xlink": XLINK_NS})
        for name, value in (root_attrs or {}).items():
            self._root.set(name, str(value))
        self._defs = etree.SubElement(self._root, _svg_tag("defs"))
        self._inline = inline
        self._ids: list[str] = []

    @property
    def ids(self) -> tuple[str, ...]:
        """Return the identifiers added so far, in insertion order."""

        return tuple(self._ids)

    def add(self, identifier: str, markup: str) -> SpriteStore:
        """Append ``markup`` to the sprite as a symbol named ``identifier``.

        Args:
            identifier: Value for the symbol ``id`` attribute.
            markup: Complete SVG document text.

        Returns:
            SpriteStore: ``self`` to allow chaining.

        Raises:
            SpriteMergeError: If ``markup`` is not well-formed XML.
        """

        try:
            icon = etree.fromstring(markup.encode("utf-8"), parser=_PARSER)
        except etree.XMLSyntaxError as exc:
            raise SpriteMergeError(f"Invalid SVG markup for icon {identifier!r}: {exc}") from exc
        _adopt_svg_namespace(icon)

        symbol = etree.SubElement(self._root, _svg_tag("symbol"))
        symbol.set("id", identifier)
        for name in SYMBOL_ATTRIBUTES:
            value = icon.get(name)
            if value is not None:
                symbol.set(name, value)

        for child in list(icon):
            if child.tag == _svg_tag("defs"):
                self._defs.extend(list(child))
            else:
                symbol.append(child)
        self._ids.append(identifier)
        return self

    def to_string(self) -> str:
        """Return the sprite sheet markup."""

        etree.cleanup_namespaces(self._root, top_nsmap={None: SVG_NS, "xlink": XLINK_NS})
        markup = etree.tostring(self._root, encoding="unicode")
        return markup if self._inline else f"{XML_PROLOGUE}{markup}"

    def __str__(self) -> str:
        return self.to_string()


def merge_sprites(
    icons: Iterable[tuple[str, str]],
    *,
    root_attrs: Mapping[str, str] | None = None,
    inline: bool = True,
) -> str:
    """Return a sprite sheet combining ``icons`` in order.

    Args:
        icons: ``(identifier, markup)`` pairs.
        root_attrs: Attributes applied to the outer ``<svg>`` element.
        inline: When ``False`` the XML declaration and doctype are emitted.

    Returns:
        str: Serialised sprite sheet.
    """

    store = SpriteStore(root_attrs=root_attrs, inline=inline)
    for identifier, markup in icons:
        store.add(identifier, markup)
    return store.to_string()


__all__ = [
    "HIDDEN_ROOT_ATTRIBUTES",
    "SVG_NS",
    "SYMBOL_ATTRIBUTES",
    "SpriteStore",
    "XLINK_NS",
    "merge_sprites",
]
