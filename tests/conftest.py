"""Shared fixtures and source builders for the test suite."""

from typing import Any

import pytest
from fontTools.misc.transform import Transform
from ufoLib2 import Font
from ufoLib2.objects import Anchor, Component, Contour, Point


class StubCategorizer:
    """Categorizer with fixed lookup tables."""

    def __init__(
        self,
        by_codepoint: dict[int, str] | None = None,
        by_name: dict[str, str] | None = None,
    ) -> None:
        self.by_codepoint = by_codepoint or {}
        self.by_name = by_name or {}
        self.calls: list[tuple[str, Any]] = []

    def lookup_by_codepoint(self, codepoint: int) -> str | None:
        self.calls.append(("codepoint", codepoint))
        return self.by_codepoint.get(codepoint)

    def lookup_by_name(self, name: str) -> str | None:
        self.calls.append(("name", name))
        return self.by_name.get(name)


def latin_categorizer() -> StubCategorizer:
    return StubCategorizer(
        by_codepoint={cp: "Latin" for cp in range(0x41, 0x7B)} | {0x03B1: "Greek"},
        by_name={"a": "Latin", "A": "Latin", "alpha": "Greek"},
    )


@pytest.fixture
def categorizer() -> StubCategorizer:
    """Categorizer filing ASCII letters under Latin and alpha under Greek."""
    return latin_categorizer()


def square(x: float = 0, y: float = 0, size: float = 100) -> Contour:
    """A closed square contour of line points."""
    return Contour(
        points=[
            Point(x, y, type="line"),
            Point(x + size, y, type="line"),
            Point(x + size, y + size, type="line"),
            Point(x, y + size, type="line"),
        ]
    )


def add_glyph(
    font: Font,
    name: str,
    unicodes: list[int] | None = None,
    width: float = 500,
    contours: list[Contour] | None = None,
    components: list[tuple[str, tuple[float, ...]]] | None = None,
    anchors: list[tuple[str, float, float]] | None = None,
    layer_name: str | None = None,
) -> None:
    """Add a glyph to the default layer (or the named layer, created on demand)."""
    if layer_name is None:
        layer = font.layers.defaultLayer
    elif layer_name in font.layers:
        layer = font.layers[layer_name]
    else:
        layer = font.layers.newLayer(layer_name)

    glyph = layer.newGlyph(name)
    glyph.unicodes = list(unicodes or [])
    glyph.width = width
    for contour in contours or []:
        glyph.contours.append(contour)
    for base, transform in components or []:
        glyph.components.append(Component(baseGlyph=base, transformation=Transform(*transform)))
    for anchor_name, x, y in anchors or []:
        glyph.anchors.append(Anchor(x=x, y=y, name=anchor_name))


def make_source(style_name: str | None, glyph_names: list[str] | None = None) -> Font:
    """A UFO with the given style name and simple glyphs.

    Single ASCII letters get their own code point.
    """
    font = Font()
    font.info.styleName = style_name
    for name in glyph_names or []:
        unicodes = [ord(name)] if len(name) == 1 else []
        add_glyph(font, name, unicodes=unicodes, contours=[square()])
    return font
