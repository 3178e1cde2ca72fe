"""Converters between ufoLib2 and domain models.

This module handles the conversion between ufoLib2 glyph objects and our
Layer model (anchors, components, contours and metrics). Coordinates are
carried over verbatim.
"""

import unicodedata
from collections.abc import Iterable

from fontTools.misc.transform import Transform
from ufoLib2.objects import Anchor as UfoAnchor
from ufoLib2.objects import Component as UfoComponent
from ufoLib2.objects import Contour as UfoContour
from ufoLib2.objects import Glyph as UfoGlyph
from ufoLib2.objects import Point as UfoPoint

from fontgarden.domain import (
    AffineTransform,
    Anchor,
    Component,
    Contour,
    ContourPoint,
    Layer,
    PointType,
)
from fontgarden.exceptions import NamingError

VERTICAL_ORIGIN_KEY = "public.verticalOrigin"


def ufo_glyph_to_layer(glyph: UfoGlyph) -> Layer:
    """Convert a ufoLib2 glyph to a domain Layer.

    A glyph's height only makes sense together with a vertical origin in
    its lib, so y_advance is taken only when the origin is present.

    Args:
        glyph: The ufoLib2 glyph

    Returns:
        Domain Layer
    """
    vertical_origin = glyph.lib.get(VERTICAL_ORIGIN_KEY)
    if isinstance(vertical_origin, bool) or not isinstance(vertical_origin, (int, float)):
        vertical_origin = None

    return Layer(
        anchors=[
            Anchor(name=anchor.name or "", x=float(anchor.x), y=float(anchor.y))
            for anchor in glyph.anchors
        ],
        components=[
            Component(
                base_glyph_name=component.baseGlyph,
                transform=AffineTransform(*(float(v) for v in component.transformation)),
            )
            for component in glyph.components
        ],
        contours=[_ufo_contour_to_domain(contour) for contour in glyph.contours],
        x_advance=float(glyph.width),
        y_advance=float(glyph.height) if vertical_origin is not None else None,
        vertical_origin=float(vertical_origin) if vertical_origin is not None else None,
    )


def _ufo_contour_to_domain(contour: UfoContour) -> Contour:
    return Contour(
        points=[
            ContourPoint(
                x=float(point.x),
                y=float(point.y),
                point_type=PointType(point.type) if point.type else PointType.OFF_CURVE,
                smooth=bool(point.smooth),
            )
            for point in contour.points
        ]
    )


def layer_to_ufo_glyph(
    layer: Layer,
    ufo_glyph: UfoGlyph,
    codepoints: Iterable[int] | None = None,
) -> None:
    """Populate a ufoLib2 glyph from a domain Layer.

    Code points belong to a style's primary layer only; pass None for
    secondary layers.

    Args:
        layer: Domain layer to export
        ufo_glyph: Empty ufoLib2 glyph to fill in place
        codepoints: Code points to assign, or None

    Raises:
        NamingError: If an anchor or component name breaks UFO naming rules
    """
    glyph_name = ufo_glyph.name or ""

    if codepoints is not None:
        ufo_glyph.unicodes = sorted(codepoints)

    ufo_glyph.width = layer.x_advance if layer.x_advance is not None else 0
    if layer.y_advance is not None and layer.vertical_origin is not None:
        ufo_glyph.height = layer.y_advance
        ufo_glyph.lib[VERTICAL_ORIGIN_KEY] = layer.vertical_origin

    for anchor in layer.anchors:
        # Unnamed UFO anchors come in with an empty name and go back out unnamed.
        if anchor.name:
            check_name("anchor", glyph_name, anchor.name)
        ufo_glyph.anchors.append(UfoAnchor(x=anchor.x, y=anchor.y, name=anchor.name or None))

    for contour in layer.contours:
        ufo_glyph.contours.append(
            UfoContour(
                points=[
                    UfoPoint(
                        x=point.x,
                        y=point.y,
                        type=(
                            None
                            if point.point_type == PointType.OFF_CURVE
                            else point.point_type.value
                        ),
                        smooth=point.smooth,
                    )
                    for point in contour.points
                ]
            )
        )

    for component in layer.components:
        check_name("component", glyph_name, component.base_glyph_name)
        ufo_glyph.components.append(
            UfoComponent(
                baseGlyph=component.base_glyph_name,
                transformation=Transform(*component.transform.to_tuple()),
            )
        )


def check_name(kind: str, glyph_name: str, name: str) -> None:
    """Validate a name against the UFO naming rules.

    Names must not be empty and must not contain control characters.

    Raises:
        NamingError: If the name is invalid
    """
    if not name:
        raise NamingError(kind, glyph_name, name, "name must not be empty")
    for char in name:
        if unicodedata.category(char) == "Cc":
            raise NamingError(
                kind, glyph_name, name, f"contains control character U+{ord(char):04X}"
            )
