"""Glyph representation and metadata.

This module defines the glyph domain model: a named design unit holding
glyph-level metadata (code points, export name, OpenType category, set)
and one layer per style or sublayer.

Layer names are compound keys: "<style>" for a style's primary layer and
"<style>.<sublayer>" for everything else, e.g. "Bold.background".
"""

import builtins
from dataclasses import dataclass, field
from enum import Enum

from fontgarden.domain.layer import Layer

LAYER_SEPARATOR = "."


class OpenTypeCategory(str, Enum):
    """OpenType glyph class used for GDEF generation."""

    UNASSIGNED = "unassigned"
    BASE = "base"
    LIGATURE = "ligature"
    MARK = "mark"
    COMPONENT = "component"

    @classmethod
    def parse(cls, value: str) -> "OpenTypeCategory":
        """Parse a category name.

        Raises:
            ValueError: If the name is not one of the known categories
        """
        try:
            return cls(value)
        except ValueError:
            raise ValueError(
                "Category must be unassigned, base, ligature, mark or component, "
                f"got {value!r}"
            ) from None


def layer_name_for(style_name: str, sublayer_name: str | None = None) -> str:
    """Build the compound layer name for a style and optional sublayer."""
    if sublayer_name is None:
        return style_name
    return f"{style_name}{LAYER_SEPARATOR}{sublayer_name}"


def split_layer_name(layer_name: str) -> tuple[str, str | None]:
    """Split a compound layer name on its first separator.

    Returns:
        Tuple of (style name, sublayer name or None for a primary layer)
    """
    style_name, separator, sublayer_name = layer_name.partition(LAYER_SEPARATOR)
    if not separator:
        return style_name, None
    return style_name, sublayer_name


def layer_belongs_to_style(layer_name: str, style_name: str) -> bool:
    """Check if a compound layer name is the style's primary or one of its sublayers."""
    return split_layer_name(layer_name)[0] == style_name


@dataclass
class Glyph:
    """A single glyph with its metadata and layers.

    Attributes:
        codepoints: Unicode scalar values mapped to this glyph
        layers: Layers keyed by compound layer name
        opentype_category: OpenType glyph class
        postscript_name: Name to rename the glyph to on export, if any
        set: Set the glyph is filed under; None means "Common"
    """

    codepoints: set[int] = field(default_factory=set)
    layers: dict[str, Layer] = field(default_factory=dict)
    opentype_category: OpenTypeCategory = OpenTypeCategory.UNASSIGNED
    postscript_name: str | None = None
    set: str | None = None

    def is_empty(self) -> bool:
        """Check if no layer carries data.

        Empty glyphs get no directory on disk; only their manifest row.
        """
        return all(layer.is_empty() for layer in self.layers.values())

    # The "set" field shadows the builtin for annotations in the class body.
    def component_names(self) -> builtins.set[str]:
        """Names of all glyphs referenced as components in any layer."""
        names: set[str] = set()
        for layer in self.layers.values():
            names |= layer.component_names()
        return names

    def remove_style_layers(self, style_name: str) -> list[str]:
        """Drop the primary layer and all sublayers of a style.

        Returns:
            Names of the layers that were removed
        """
        removed = [name for name in self.layers if layer_belongs_to_style(name, style_name)]
        for name in removed:
            del self.layers[name]
        return removed
