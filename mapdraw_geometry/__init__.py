"""
Geometry Layer
==============

Bounded Context: Geometry values and their Well-Known Text form.

Responsibilities:
- Shape representation (immutable Point / Polygon)
- WKT decode/encode
- GeoJSON dict interchange
- NO scene graph, NO layers, NO drawing

Usage:

    from mapdraw_geometry import decode, encode, Point

    geometry = decode("POLYGON ((0 0, 4 0, 4 4, 0 4, 0 0))")
    geometry.vertex_count          # 4
    encode(Point(10, 20))          # 'POINT (10 20)'
"""

from mapdraw_geometry.errors import GeometryError, ParseError, UnsupportedGeometryError
from mapdraw_geometry.shapes import (
    Coordinate,
    Geometry,
    GeometryKind,
    Point,
    Polygon,
    geometry_from_dict,
)
from mapdraw_geometry.wkt import decode, encode, from_shape, to_shape

__all__ = [
    # Errors
    "GeometryError",
    "ParseError",
    "UnsupportedGeometryError",
    # Shapes
    "Coordinate",
    "Geometry",
    "GeometryKind",
    "Point",
    "Polygon",
    "geometry_from_dict",
    # Codec
    "decode",
    "encode",
    "from_shape",
    "to_shape",
]

__version__ = "1.0.0"
