"""
Geometry Error Taxonomy
=======================

- GeometryError: base for every codec failure (a ValueError)
- ParseError: text does not follow the WKT grammar
- UnsupportedGeometryError: valid geometry outside the point/polygon set

Callers distinguish "invalid" from "not supported" by catching the two
subclasses separately.
"""

from typing import Optional


class GeometryError(ValueError):
    """Base class for geometry codec errors."""
    pass


class ParseError(GeometryError):
    """Raised when geometry text is malformed."""

    def __init__(self, message: str, text: Optional[str] = None):
        super().__init__(message)
        self.text = text


class UnsupportedGeometryError(GeometryError):
    """Raised when a geometry is well formed but its type is not supported."""

    def __init__(self, message: str, geometry_type: Optional[str] = None):
        super().__init__(message)
        self.geometry_type = geometry_type
