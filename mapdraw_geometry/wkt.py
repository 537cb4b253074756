"""
WKT Codec Module
================

Bidirectional conversion between Well-Known Text and Geometry values.

Design:
- Pure function pair: decode(text) / encode(geometry)
- shapely (GEOS) does the reading and writing, we only map its results
  onto the closed Point | Polygon union and its errors onto our taxonomy
- 2D only; (x, y) order is kept as written

Supported subset:
    POINT (x y)
    POLYGON ((x1 y1, x2 y2, ..., x1 y1))
"""

import re

import shapely
from shapely.errors import ShapelyError
from shapely.geometry.base import BaseGeometry

from mapdraw_geometry.errors import ParseError, UnsupportedGeometryError
from mapdraw_geometry.shapes import Geometry, Point, Polygon

# Every geometry keyword of the WKT grammar; only the first two are decoded
WKT_KEYWORDS = frozenset({
    "POINT",
    "POLYGON",
    "LINESTRING",
    "MULTIPOINT",
    "MULTILINESTRING",
    "MULTIPOLYGON",
    "GEOMETRYCOLLECTION",
    "CIRCULARSTRING",
    "COMPOUNDCURVE",
    "CURVEPOLYGON",
    "MULTICURVE",
    "MULTISURFACE",
    "TRIANGLE",
    "TIN",
    "POLYHEDRALSURFACE",
})

_KEYWORD_PATTERN = re.compile(r"^\s*([A-Za-z]+)")


def _keyword(text: str) -> str:
    match = _KEYWORD_PATTERN.match(text)
    if match is None:
        raise ParseError(f"Missing geometry keyword in {text!r}", text)

    keyword = match.group(1).upper()
    if keyword not in WKT_KEYWORDS:
        raise ParseError(f"Unknown geometry keyword {match.group(1)!r}", text)
    return keyword


def from_shape(shape: BaseGeometry) -> Geometry:
    """
    Convert a shapely geometry into a Point or Polygon.

    Raises:
        ParseError: If the geometry is not two-dimensional
        UnsupportedGeometryError: If the type is not supported, the geometry
            is empty or the polygon has interior rings
    """
    if shape.geom_type not in ("Point", "Polygon"):
        raise UnsupportedGeometryError(
            f"Geometry type {shape.geom_type!r} is not supported", shape.geom_type
        )
    if shape.is_empty:
        raise UnsupportedGeometryError(
            f"Empty {shape.geom_type} is not supported", shape.geom_type
        )
    if shapely.get_coordinate_dimension(shape) != 2:
        raise ParseError(
            f"Expected 2D coordinates, got {shapely.get_coordinate_dimension(shape)} values per coordinate"
        )

    if shape.geom_type == "Point":
        return Point(x=shape.x, y=shape.y)

    if len(shape.interiors) > 0:
        raise UnsupportedGeometryError(
            f"Polygons with interior rings are not supported, got {len(shape.interiors)}",
            shape.geom_type,
        )
    return Polygon(ring=tuple(shape.exterior.coords))


def to_shape(geometry: Geometry) -> BaseGeometry:
    """Convert a Point or Polygon into the equivalent shapely geometry."""
    if isinstance(geometry, Point):
        return shapely.Point(geometry.x, geometry.y)
    if isinstance(geometry, Polygon):
        return shapely.Polygon(geometry.ring)
    raise TypeError(f"Expected Point or Polygon, got {type(geometry).__name__}")


def decode(text: str) -> Geometry:
    """
    Parse Well-Known Text into a Geometry.

    Args:
        text: WKT string, e.g. "POINT (10 20)"

    Returns:
        Point or Polygon

    Raises:
        ParseError: Malformed text (unbalanced parentheses, non-numeric
            tokens, unknown keyword, wrong coordinate arity, unclosed ring,
            non-finite coordinates, fewer than 3 distinct ring vertices)
        UnsupportedGeometryError: Well-formed but not a point or polygon

    Example:
        >>> decode("POINT (10 20)")
        Point(x=10.0, y=20.0)
    """
    if not isinstance(text, str):
        raise ParseError(f"Expected WKT string, got {type(text).__name__}")

    keyword = _keyword(text)

    try:
        shape = shapely.from_wkt(text)
    except ShapelyError as e:
        raise ParseError(f"Invalid {keyword} text: {e}", text) from e

    if shape is None:
        raise ParseError(f"Invalid {keyword} text", text)

    try:
        return from_shape(shape)
    except UnsupportedGeometryError:
        raise
    except ValueError as e:
        # Non-finite coordinates or a degenerate ring that GEOS still reads
        raise ParseError(str(e), text) from e


def encode(geometry: Geometry) -> str:
    """
    Serialize a Geometry to Well-Known Text.

    Numbers use the shortest representation that reads back to the same
    value; polygon rings are always written closed.

    Example:
        >>> encode(Point(10, 20))
        'POINT (10 20)'
    """
    return shapely.to_wkt(to_shape(geometry), rounding_precision=-1, trim=True)
