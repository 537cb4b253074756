"""
Scene Interchange Module
========================

Moves shapes between a layer tree and geometry text.

Message Flow:
    LayerGroup -> flatten() -> encode() -> ["POINT (..)", "POLYGON ((..))"]
    ["POINT (..)", ...] -> decode() -> MarkerLayer | PolygonLayer -> LayerGroup

Codec errors propagate to the caller unchanged; nothing is retried or
skipped.
"""

from typing import Iterable, List, Union

from mapdraw_geometry import Geometry, GeometryError, Point, Polygon, decode, encode
from mapdraw_layers.flatten import flatten
from mapdraw_layers.layer import (
    DrawableLayer,
    LayerGroup,
    MarkerLayer,
    PolygonLayer,
    create_layer_group,
)
from mapdraw_logging import LogEvent, create_logger

logger = create_logger("scene")


def layer_from_geometry(geometry: Geometry) -> DrawableLayer:
    """Build the leaf layer matching the geometry variant."""
    if isinstance(geometry, Point):
        return MarkerLayer(geometry)
    if isinstance(geometry, Polygon):
        return PolygonLayer(geometry)
    raise TypeError(f"Expected Point or Polygon, got {type(geometry).__name__}")


def layer_from_wkt(text: str) -> DrawableLayer:
    """
    Decode geometry text into a new leaf layer.

    Raises:
        ParseError: Malformed text
        UnsupportedGeometryError: Not a point or polygon
    """
    return layer_from_geometry(decode(text))


def layer_to_wkt(layer: DrawableLayer) -> str:
    return encode(layer.geometry)


def export_wkt(root: Union[DrawableLayer, LayerGroup]) -> List[str]:
    """
    Serialize every leaf under root, in flatten order.

    Returns:
        One WKT string per leaf layer
    """
    texts = [layer_to_wkt(layer) for layer in flatten(root)]
    logger.info(
        event=LogEvent.SCENE_EXPORTED,
        message=f"Exported {len(texts)} layers",
        metadata={'layer_count': len(texts)}
    )
    return texts


def import_wkt(texts: Iterable[str]) -> LayerGroup:
    """
    Decode each text into a leaf layer inside a new group.

    The first invalid text aborts the import and its error propagates.
    """
    group = create_layer_group()
    for index, text in enumerate(texts):
        try:
            group.add_layer(layer_from_wkt(text))
        except GeometryError as e:
            logger.error(
                event=LogEvent.WKT_DECODE_FAILED,
                message=f"Import aborted at text #{index}",
                metadata={'index': index, 'text': text},
                exc_info=e
            )
            raise

    logger.info(
        event=LogEvent.SCENE_IMPORTED,
        message=f"Imported {len(group)} layers",
        metadata={'layer_count': len(group)}
    )
    return group


def set_editing(root: Union[DrawableLayer, LayerGroup], enabled: bool) -> int:
    """
    Enable or disable interactive editing on every leaf under root.

    Returns:
        Number of leaf layers touched
    """
    layers = flatten(root)
    for layer in layers:
        if enabled:
            layer.editing.enable()
        else:
            layer.editing.disable()

    logger.debug(
        event=LogEvent.SCENE_EDITING_TOGGLED,
        message=f"Editing {'enabled' if enabled else 'disabled'} on {len(layers)} layers",
        metadata={'layer_count': len(layers), 'enabled': enabled}
    )
    return len(layers)
