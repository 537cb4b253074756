"""
Draw Session
============

Bounded Context: Configuration of the external drawing toolkit and the
custom tooltips added to its controls.

    mapdraw_draw/
    ├── config.py   # DRAW_ELEMENT_OPTIONS, PathStyle, get_draw_options, DrawSessionConfig
    └── tooltip.py  # augment_tooltip, augment_draw_controls
"""

from mapdraw_draw.config import (
    ATTRIBUTION_OPTIONS,
    DRAW_ELEMENT_OPTIONS,
    MAP_OPTIONS,
    MAP_READ_ONLY_OPTIONS,
    POLYGON_SHAPE_OPTIONS,
    TILE_LAYER_OPTIONS,
    ZOOM_OPTIONS,
    ControlPosition,
    DrawElementOptions,
    DrawSessionConfig,
    PathStyle,
    get_draw_options,
)
from mapdraw_draw.tooltip import (
    DrawControlElements,
    augment_draw_controls,
    augment_tooltip,
    find_control,
    set_tooltip_text,
    tooltip_text_key,
)

__all__ = [
    # Config
    "ATTRIBUTION_OPTIONS",
    "DRAW_ELEMENT_OPTIONS",
    "MAP_OPTIONS",
    "MAP_READ_ONLY_OPTIONS",
    "POLYGON_SHAPE_OPTIONS",
    "TILE_LAYER_OPTIONS",
    "ZOOM_OPTIONS",
    "ControlPosition",
    "DrawElementOptions",
    "DrawSessionConfig",
    "PathStyle",
    "get_draw_options",
    # Tooltips
    "DrawControlElements",
    "augment_draw_controls",
    "augment_tooltip",
    "find_control",
    "set_tooltip_text",
    "tooltip_text_key",
]
