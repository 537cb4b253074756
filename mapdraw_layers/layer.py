"""
Layer Tree Module
=================

Leaf layers and layer groups at the rendering-engine boundary.

Design:
- Explicit tree type: leaf (MarkerLayer | PolygonLayer) vs LayerGroup
- Groups keep children in insertion order and carry no geometry
- Leaves carry a kind, a geometry and an editing capability
- Only the capabilities the engine exposes are modelled:
  create_layer_group(), for_each_child(fn), editing.enable()/disable()
"""

from enum import Enum
from typing import Callable, Iterable, List, Union

from mapdraw_geometry import Point, Polygon
from mapdraw_geometry.shapes import Coordinate


class LayerKind(str, Enum):
    """Drawing kind of a leaf layer (closed set)."""
    MARKER = "marker"
    POLYGON = "polygon"


class LayerEditingError(RuntimeError):
    """Raised when a leaf is modified while editing is disabled."""
    pass


class LayerEditing:
    """
    Interactive editing capability of a leaf layer.

    Editing starts disabled; the drawing toolkit enables it for the shapes
    the user is allowed to move or reshape.
    """

    def __init__(self):
        self._enabled = False

    def enable(self) -> None:
        self._enabled = True

    def disable(self) -> None:
        self._enabled = False

    @property
    def enabled(self) -> bool:
        return self._enabled


class MarkerLayer:
    """
    Leaf layer holding a point.

    Example:
        >>> marker = MarkerLayer(Point(10, 20))
        >>> marker.kind
        <LayerKind.MARKER: 'marker'>
    """

    kind = LayerKind.MARKER

    def __init__(self, geometry: Point):
        if not isinstance(geometry, Point):
            raise TypeError(f"MarkerLayer requires a Point, got {type(geometry).__name__}")
        self._geometry = geometry
        self.editing = LayerEditing()

    @property
    def geometry(self) -> Point:
        return self._geometry

    def set_geometry(self, geometry: Point) -> None:
        """
        Move the marker.

        Raises:
            TypeError: If geometry is not a Point
            LayerEditingError: If editing is disabled
        """
        if not isinstance(geometry, Point):
            raise TypeError(f"MarkerLayer requires a Point, got {type(geometry).__name__}")
        if not self.editing.enabled:
            raise LayerEditingError("Cannot move a marker while editing is disabled")
        self._geometry = geometry

    def __repr__(self) -> str:
        return f"MarkerLayer({self._geometry!r})"


class PolygonLayer:
    """
    Leaf layer holding a polygon.

    Exposes the polygon-specific capabilities `ring` and `area` that
    classification probes for.
    """

    kind = LayerKind.POLYGON

    def __init__(self, geometry: Polygon):
        if not isinstance(geometry, Polygon):
            raise TypeError(f"PolygonLayer requires a Polygon, got {type(geometry).__name__}")
        self._geometry = geometry
        self.editing = LayerEditing()

    @property
    def geometry(self) -> Polygon:
        return self._geometry

    @property
    def ring(self) -> List[Coordinate]:
        return list(self._geometry.ring)

    @property
    def area(self) -> float:
        return self._geometry.area

    def set_geometry(self, geometry: Polygon) -> None:
        """
        Reshape the polygon.

        Raises:
            TypeError: If geometry is not a Polygon
            LayerEditingError: If editing is disabled
        """
        if not isinstance(geometry, Polygon):
            raise TypeError(f"PolygonLayer requires a Polygon, got {type(geometry).__name__}")
        if not self.editing.enabled:
            raise LayerEditingError("Cannot reshape a polygon while editing is disabled")
        self._geometry = geometry

    def __repr__(self) -> str:
        return f"PolygonLayer({self._geometry!r})"


DrawableLayer = Union[MarkerLayer, PolygonLayer]


class LayerGroup:
    """
    Ordered container of leaf layers and nested groups.

    Purely structural: no geometry, never serialized itself.
    """

    def __init__(self):
        self._children: List[Union[DrawableLayer, 'LayerGroup']] = []

    def add_layer(self, layer: Union[DrawableLayer, 'LayerGroup']) -> 'LayerGroup':
        """Append a child; adding the same child twice is a no-op."""
        if layer is self:
            raise ValueError("A layer group cannot contain itself")
        if not self.has_layer(layer):
            self._children.append(layer)
        return self

    def remove_layer(self, layer: Union[DrawableLayer, 'LayerGroup']) -> 'LayerGroup':
        """Remove a child; removing an absent child is a no-op."""
        self._children = [child for child in self._children if child is not layer]
        return self

    def has_layer(self, layer: Union[DrawableLayer, 'LayerGroup']) -> bool:
        return any(child is layer for child in self._children)

    def for_each_child(self, fn: Callable[[Union[DrawableLayer, 'LayerGroup']], None]) -> None:
        """Call fn on each direct child in insertion order."""
        for child in list(self._children):
            fn(child)

    def __len__(self) -> int:
        return len(self._children)

    def __repr__(self) -> str:
        return f"LayerGroup({len(self._children)} children)"


def create_layer_group(layers: Iterable[Union[DrawableLayer, LayerGroup]] = ()) -> LayerGroup:
    """Create a group holding the given layers in order."""
    group = LayerGroup()
    for layer in layers:
        group.add_layer(layer)
    return group
