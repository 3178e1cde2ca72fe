"""Domain models for fontgarden.

This module contains the core domain models representing a Fontgarden
project, its glyphs, their layers and the outline data inside them. All
models are designed to be:

- Plain dataclasses compared by value
- Serializable to the JSON layer payloads stored on disk
- Independent of ufoLib2 implementation details

Key classes:
- ContourPoint: A 2D point with curve metadata
- Contour: An ordered list of points
- Anchor, Component, AffineTransform: Layer attachments and references
- Layer: The per-style payload of one glyph
- Glyph: Glyph-level metadata plus layers
- Fontgarden: All glyphs of a project, keyed by name
"""

from fontgarden.domain.contour import Contour, ContourPoint, PointType
from fontgarden.domain.fontgarden import COMMON_SET_NAME, Fontgarden, set_label, set_value
from fontgarden.domain.glyph import (
    Glyph,
    OpenTypeCategory,
    layer_belongs_to_style,
    layer_name_for,
    split_layer_name,
)
from fontgarden.domain.layer import AffineTransform, Anchor, Component, Layer

__all__: list[str] = [
    "COMMON_SET_NAME",
    # Enums
    "OpenTypeCategory",
    "PointType",
    # Core types
    "AffineTransform",
    "Anchor",
    "Component",
    "Contour",
    "ContourPoint",
    "Fontgarden",
    "Glyph",
    "Layer",
    # Layer and set naming
    "layer_belongs_to_style",
    "layer_name_for",
    "set_label",
    "set_value",
    "split_layer_name",
]
