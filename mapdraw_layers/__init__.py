"""
Layers
======

Bounded Context: Drawable layers, their normalization and interchange.

Architecture:

    mapdraw_layers/
    ├── layer.py      # LayerKind, MarkerLayer, PolygonLayer, LayerGroup
    ├── flatten.py    # classify(), flatten(), collect()
    └── convert.py    # layer <-> WKT, scene export/import, editing toggle

Usage:

    from mapdraw_layers import create_layer_group, layer_from_wkt, export_wkt

    scene = create_layer_group([
        layer_from_wkt("POINT (10 20)"),
        create_layer_group([layer_from_wkt("POLYGON ((0 0, 4 0, 4 4, 0 0))")]),
    ])
    export_wkt(scene)   # ['POINT (10 20)', 'POLYGON ((0 0, 4 0, 4 4, 0 0))']
"""

from mapdraw_layers.layer import (
    DrawableLayer,
    LayerEditing,
    LayerEditingError,
    LayerGroup,
    LayerKind,
    MarkerLayer,
    PolygonLayer,
    create_layer_group,
)
from mapdraw_layers.flatten import classify, collect, flatten
from mapdraw_layers.convert import (
    export_wkt,
    import_wkt,
    layer_from_geometry,
    layer_from_wkt,
    layer_to_wkt,
    set_editing,
)

__all__ = [
    # Tree
    "DrawableLayer",
    "LayerEditing",
    "LayerEditingError",
    "LayerGroup",
    "LayerKind",
    "MarkerLayer",
    "PolygonLayer",
    "create_layer_group",
    # Normalization
    "classify",
    "collect",
    "flatten",
    # Interchange
    "export_wkt",
    "import_wkt",
    "layer_from_geometry",
    "layer_from_wkt",
    "layer_to_wkt",
    "set_editing",
]
