"""Outline types for layer representation.

This module defines the outline types stored verbatim in a layer:
- PointType: Enum for the role of a point on a contour
- ContourPoint: A 2D point with curve type information
- Contour: An ordered list of points

Coordinates are never interpreted; they are stored exactly as received.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class PointType(str, Enum):
    """Point type on a contour.

    Values follow the UFO vocabulary, with OFF_CURVE standing in for the
    absent type attribute of UFO off-curve points. Layer files use the
    capitalized stored names under the "typ" key instead.
    """

    OFF_CURVE = "offcurve"
    MOVE = "move"
    LINE = "line"
    CURVE = "curve"
    QCURVE = "qcurve"

    @property
    def stored_name(self) -> str:
        """Name written to layer files, e.g. "QCurve"."""
        return STORED_POINT_TYPES[self]

    @classmethod
    def from_stored_name(cls, name: Any) -> "PointType":
        """Parse a point type name read from a layer file.

        Raises:
            ValueError: If the name is not a known stored point type
        """
        for point_type, stored in STORED_POINT_TYPES.items():
            if stored == name:
                return point_type
        raise ValueError(
            f"field 'typ' must be one of {', '.join(STORED_POINT_TYPES.values())}, got {name!r}"
        )


STORED_POINT_TYPES = {
    PointType.OFF_CURVE: "OffCurve",
    PointType.MOVE: "Move",
    PointType.LINE: "Line",
    PointType.CURVE: "Curve",
    PointType.QCURVE: "QCurve",
}

POINT_FIELDS = frozenset({"x", "y", "typ", "smooth"})


def require_number(data: dict[str, Any], key: str) -> float:
    """Fetch a required numeric field from a deserialized mapping.

    Raises:
        KeyError: If the field is missing
        ValueError: If the field is not a number
    """
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"field '{key}' must be a number, got {value!r}")
    return float(value)


def optional_number(data: dict[str, Any], key: str) -> float | None:
    """Fetch an optional numeric field from a deserialized mapping."""
    if data.get(key) is None:
        return None
    return require_number(data, key)


@dataclass(frozen=True, slots=True)
class ContourPoint:
    """A point in 2D space with curve metadata.

    Attributes:
        x: X coordinate in font units
        y: Y coordinate in font units
        point_type: Role of the point on the contour
        smooth: Whether the point is a smooth connection
    """

    x: float
    y: float
    point_type: PointType = PointType.OFF_CURVE
    smooth: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary, omitting default type and smoothness."""
        data: dict[str, Any] = {"x": self.x, "y": self.y}
        if self.point_type != PointType.OFF_CURVE:
            data["typ"] = self.point_type.stored_name
        if self.smooth:
            data["smooth"] = True
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ContourPoint":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x, y and optional typ and smooth fields

        Returns:
            ContourPoint instance

        Raises:
            ValueError: If a field is unknown or has the wrong type
        """
        unknown = sorted(set(data) - POINT_FIELDS)
        if unknown:
            raise ValueError(f"unknown point fields: {', '.join(unknown)}")
        smooth = data.get("smooth", False)
        if not isinstance(smooth, bool):
            raise ValueError(f"field 'smooth' must be a boolean, got {smooth!r}")
        point_type = PointType.OFF_CURVE
        if "typ" in data:
            point_type = PointType.from_stored_name(data["typ"])
        return cls(
            x=require_number(data, "x"),
            y=require_number(data, "y"),
            point_type=point_type,
            smooth=smooth,
        )


@dataclass
class Contour:
    """An ordered sequence of points forming one path of an outline.

    Attributes:
        points: List of points forming the contour
    """

    points: list[ContourPoint] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"points": [p.to_dict() for p in self.points]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Contour":
        """Deserialize from dictionary."""
        return cls(points=[ContourPoint.from_dict(p) for p in data["points"]])
