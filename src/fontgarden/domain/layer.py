"""Layer representation.

A layer is the per-style (or per-sublayer) payload of one glyph: its
anchors, component references, contours and advances. Layers are the unit
that gets written to one JSON file on disk.
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar

from fontgarden.domain.contour import Contour, optional_number, require_number


@dataclass
class Anchor:
    """A named attachment point.

    Attributes:
        name: Anchor name (e.g., "top", "_bottom")
        x: X coordinate in font units
        y: Y coordinate in font units
    """

    name: str
    x: float
    y: float

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"name": self.name, "x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Anchor":
        """Deserialize from dictionary."""
        name = data["name"]
        if not isinstance(name, str):
            raise ValueError(f"anchor name must be a string, got {name!r}")
        return cls(name=name, x=require_number(data, "x"), y=require_number(data, "y"))


@dataclass(frozen=True)
class AffineTransform:
    """A 2x3 affine transformation, in the order of a PostScript matrix."""

    x_scale: float = 1.0
    xy_scale: float = 0.0
    yx_scale: float = 0.0
    y_scale: float = 1.0
    x_offset: float = 0.0
    y_offset: float = 0.0

    FIELDS: ClassVar[tuple[str, ...]] = (
        "x_scale",
        "xy_scale",
        "yx_scale",
        "y_scale",
        "x_offset",
        "y_offset",
    )

    @classmethod
    def identity(cls) -> "AffineTransform":
        """[1 0 0 1 0 0]; the identity transformation."""
        return cls()

    def is_identity(self) -> bool:
        return self == AffineTransform.identity()

    def to_tuple(self) -> tuple[float, float, float, float, float, float]:
        return (
            self.x_scale,
            self.xy_scale,
            self.yx_scale,
            self.y_scale,
            self.x_offset,
            self.y_offset,
        )

    def to_dict(self) -> dict[str, float]:
        """Serialize to dictionary, omitting fields that match the identity."""
        identity = AffineTransform.identity()
        return {
            name: getattr(self, name)
            for name in self.FIELDS
            if getattr(self, name) != getattr(identity, name)
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AffineTransform":
        """Deserialize from dictionary; missing fields take identity values."""
        values = {}
        for name in cls.FIELDS:
            value = optional_number(data, name)
            if value is not None:
                values[name] = value
        return cls(**values)


@dataclass
class Component:
    """A reference to another glyph, placed by an affine transformation.

    Attributes:
        base_glyph_name: Name of the referenced glyph
        transform: Placement of the referenced glyph
    """

    base_glyph_name: str
    transform: AffineTransform = field(default_factory=AffineTransform.identity)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary; the identity transformation is omitted."""
        data: dict[str, Any] = {"name": self.base_glyph_name}
        if not self.transform.is_identity():
            data["transformation"] = self.transform.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Component":
        """Deserialize from dictionary."""
        name = data["name"]
        if not isinstance(name, str):
            raise ValueError(f"component name must be a string, got {name!r}")
        transformation = data.get("transformation")
        return cls(
            base_glyph_name=name,
            transform=(
                AffineTransform.from_dict(transformation)
                if transformation is not None
                else AffineTransform.identity()
            ),
        )


@dataclass
class Layer:
    """The outline and metrics payload of a glyph in one layer.

    A vertical advance is meaningless without a vertical origin, so
    y_advance and vertical_origin are either both set or both None.

    Attributes:
        anchors: Attachment points, in source order
        components: Component references, in source order
        contours: Outline contours, in source order
        x_advance: Horizontal advance width
        y_advance: Vertical advance height
        vertical_origin: Vertical origin for vertical layout
    """

    anchors: list[Anchor] = field(default_factory=list)
    components: list[Component] = field(default_factory=list)
    contours: list[Contour] = field(default_factory=list)
    x_advance: float | None = None
    y_advance: float | None = None
    vertical_origin: float | None = None

    def is_empty(self) -> bool:
        """Check if the layer carries no data at all.

        Empty layers are never written to disk.
        """
        return (
            not self.anchors
            and not self.components
            and not self.contours
            and self.x_advance is None
            and self.y_advance is None
        )

    def component_names(self) -> set[str]:
        """Names of all glyphs referenced as components."""
        return {component.base_glyph_name for component in self.components}

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary, omitting absent metrics."""
        data: dict[str, Any] = {
            "anchors": [a.to_dict() for a in self.anchors],
            "components": [c.to_dict() for c in self.components],
            "contours": [c.to_dict() for c in self.contours],
        }
        if self.vertical_origin is not None:
            data["vertical_origin"] = self.vertical_origin
        if self.x_advance is not None:
            data["x_advance"] = self.x_advance
        if self.y_advance is not None:
            data["y_advance"] = self.y_advance
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Layer":
        """Deserialize from dictionary.

        Raises:
            KeyError: If a required field is missing
            ValueError: If a field has the wrong type, or only one of
                y_advance and vertical_origin is present
        """
        if not isinstance(data, dict):
            raise ValueError(f"layer data must be an object, got {type(data).__name__}")
        y_advance = optional_number(data, "y_advance")
        vertical_origin = optional_number(data, "vertical_origin")
        if (y_advance is None) != (vertical_origin is None):
            raise ValueError("y_advance and vertical_origin must be given together")
        return cls(
            anchors=[Anchor.from_dict(a) for a in data.get("anchors", [])],
            components=[Component.from_dict(c) for c in data.get("components", [])],
            contours=[Contour.from_dict(c) for c in data.get("contours", [])],
            x_advance=optional_number(data, "x_advance"),
            y_advance=y_advance,
            vertical_origin=vertical_origin,
        )
