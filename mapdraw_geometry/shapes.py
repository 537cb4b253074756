"""
Geometric Shapes Module
========================

Pure geometry values - NO state, NO side effects.

Design:
- Closed tagged union: Geometry = Point | Polygon
- Immutable shapes (frozen dataclass pattern)
- Coordinates are (x, y) = (longitude, latitude), never swapped
- to_dict()/from_dict() speak GeoJSON geometry objects
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Sequence, Tuple, Union

import numpy as np

from mapdraw_geometry.errors import UnsupportedGeometryError

Coordinate = Tuple[float, float]


class GeometryKind(str, Enum):
    """Geometry type enumeration (GeoJSON type names)."""
    POINT = "Point"
    POLYGON = "Polygon"


def _coordinate(pair: Sequence[float]) -> Coordinate:
    """Coerce a 2-item sequence to a finite (x, y) float tuple."""
    if len(pair) != 2:
        raise ValueError(f"Coordinate must have exactly 2 values, got {len(pair)}")
    x, y = float(pair[0]), float(pair[1])
    if not (math.isfinite(x) and math.isfinite(y)):
        raise ValueError(f"Coordinate must be finite, got ({x}, {y})")
    return x, y


@dataclass(frozen=True)
class Point:
    """
    Immutable point geometry.

    Attributes:
        x: Longitude
        y: Latitude

    Example:
        >>> Point(10, 20).to_dict()
        {'type': 'Point', 'coordinates': [10.0, 20.0]}
    """

    x: float
    y: float

    def __post_init__(self):
        """Coerce and validate coordinates."""
        x, y = _coordinate((self.x, self.y))
        object.__setattr__(self, 'x', x)
        object.__setattr__(self, 'y', y)

    @property
    def kind(self) -> GeometryKind:
        return GeometryKind.POINT

    @property
    def coordinates(self) -> Coordinate:
        return self.x, self.y

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a GeoJSON geometry dict."""
        return {'type': self.kind.value, 'coordinates': [self.x, self.y]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Point':
        """Deserialize from a GeoJSON geometry dict.

        Raises:
            ValueError: If coordinates are missing or invalid
        """
        try:
            x, y = _coordinate(data['coordinates'])
        except KeyError as e:
            raise ValueError(f"Missing required Point field: {e}")
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid Point data: {e}")
        return cls(x=x, y=y)


@dataclass(frozen=True)
class Polygon:
    """
    Immutable polygon geometry with a single closed ring.

    Design:
    - Open rings are closed implicitly (first coordinate repeated as last)
    - At least 3 distinct vertices (ring length >= 4 once closed)
    - No self-intersection checks

    Attributes:
        ring: Ordered (x, y) coordinates, first == last
    """

    ring: Tuple[Coordinate, ...]

    def __post_init__(self):
        """Close the ring and validate its length."""
        ring = [_coordinate(pair) for pair in self.ring]
        if ring and ring[0] != ring[-1]:
            ring.append(ring[0])
        if len(ring) < 4:
            raise ValueError(
                f"Polygon ring must have at least 3 vertices plus closure, got {len(ring)} coordinates"
            )
        object.__setattr__(self, 'ring', tuple(ring))

    @property
    def kind(self) -> GeometryKind:
        return GeometryKind.POLYGON

    @property
    def vertices(self) -> np.ndarray:
        """Read-only Nx2 array of the closed ring."""
        vertices = np.array(self.ring, dtype=float)
        vertices.flags.writeable = False
        return vertices

    @property
    def vertex_count(self) -> int:
        """Number of vertices, not counting the closing coordinate."""
        return len(self.ring) - 1

    @property
    def area(self) -> float:
        """
        Planar area of the ring (shoelace formula).

        Units are squared coordinate units; no projection is applied.
        """
        x = self.vertices[:, 0]
        y = self.vertices[:, 1]
        return float(abs(np.dot(x[:-1], y[1:]) - np.dot(x[1:], y[:-1])) / 2.0)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a GeoJSON geometry dict."""
        return {
            'type': self.kind.value,
            'coordinates': [[[x, y] for x, y in self.ring]],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Polygon':
        """Deserialize from a GeoJSON geometry dict.

        Only the exterior ring is accepted.

        Raises:
            ValueError: If coordinates are missing or invalid
            UnsupportedGeometryError: If interior rings are present
        """
        try:
            rings = data['coordinates']
        except KeyError as e:
            raise ValueError(f"Missing required Polygon field: {e}")
        if not rings:
            raise UnsupportedGeometryError("Empty polygons are not supported", GeometryKind.POLYGON.value)
        if len(rings) > 1:
            raise UnsupportedGeometryError(
                f"Polygons with interior rings are not supported, got {len(rings) - 1}",
                GeometryKind.POLYGON.value,
            )
        try:
            return cls(ring=tuple(tuple(pair) for pair in rings[0]))
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid Polygon data: {e}")


Geometry = Union[Point, Polygon]


def geometry_from_dict(data: Dict[str, Any]) -> Geometry:
    """
    Deserialize any supported GeoJSON geometry dict.

    Raises:
        ValueError: If the type field is missing
        UnsupportedGeometryError: If the type is not Point or Polygon
    """
    try:
        geometry_type = data['type']
    except KeyError as e:
        raise ValueError(f"Missing required geometry field: {e}")

    if geometry_type == GeometryKind.POINT.value:
        return Point.from_dict(data)
    if geometry_type == GeometryKind.POLYGON.value:
        return Polygon.from_dict(data)
    raise UnsupportedGeometryError(
        f"Geometry type {geometry_type!r} is not supported", str(geometry_type)
    )
