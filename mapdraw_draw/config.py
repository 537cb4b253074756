"""
Draw session configuration.

Static, per-kind metadata and visual parameters handed to the drawing
toolkit at setup time, plus the map option tables the map widget is built
with. Every table is created once at import and exposed read-only.
Overrides for a session can be loaded from YAML into a DrawSessionConfig.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple

from matplotlib import colors as mcolors
import yaml

from mapdraw_layers import LayerKind
from mapdraw_logging import LogEvent, create_logger

logger = create_logger("config")


class ControlPosition(str, Enum):
    """Corner of the map a control is anchored to."""
    TOPLEFT = "topleft"
    TOPRIGHT = "topright"
    BOTTOMLEFT = "bottomleft"
    BOTTOMRIGHT = "bottomright"


MAP_OPTIONS: Mapping[str, Any] = MappingProxyType({
    "zoomControl": False,
    "attributionControl": False,
})

MAP_READ_ONLY_OPTIONS: Mapping[str, Any] = MappingProxyType({
    "scrollWheelZoom": False,
    "dragging": False,
    "tap": False,
})

ATTRIBUTION_OPTIONS: Mapping[str, Any] = MappingProxyType({
    "prefix": "",
    "position": ControlPosition.BOTTOMLEFT.value,
})

ZOOM_OPTIONS: Mapping[str, Any] = MappingProxyType({
    "position": ControlPosition.BOTTOMRIGHT.value,
    "zoomInText": "",
    "zoomOutText": "",
})

TILE_LAYER_OPTIONS: Mapping[str, Any] = MappingProxyType({
    "minZoom": 2,
    "maxZoom": 19,
    "crossOrigin": "anonymous",
})


@dataclass(frozen=True)
class DrawElementOptions:
    """
    Per-kind metadata of a draw control.

    Attributes:
        button_class: CSS class of the toolkit's toolbar button
        tooltip_text_key: Translation key of the tooltip
        tooltip_cancel_text_key: Translation key shown while drawing
        popup_class: CSS class of the shape's popup
    """

    button_class: str
    tooltip_text_key: str
    tooltip_cancel_text_key: str
    popup_class: str

    def to_dict(self) -> Dict[str, str]:
        """Serialize with the toolkit's field names."""
        return {
            'buttonClass': self.button_class,
            'tooltipTextKey': self.tooltip_text_key,
            'tooltipCancelTextKey': self.tooltip_cancel_text_key,
            'popupClass': self.popup_class,
        }


@dataclass(frozen=True)
class PathStyle:
    """
    Stroke and fill parameters for drawn shapes.

    Attributes:
        color: Stroke/fill color as hex ("#00A0DE")
        weight: Stroke width in pixels
        opacity: Stroke opacity in [0, 1]
        dash_array: SVG dash pattern ("6 3"), empty for a solid line
        fill_opacity: Fill opacity in [0, 1]
    """

    color: str = "#00A0DE"
    weight: float = 1
    opacity: float = 1
    dash_array: str = ""
    fill_opacity: float = 0.25

    def __post_init__(self):
        """Validate style values."""
        if not (self.color.startswith("#") and mcolors.is_color_like(self.color)):
            raise ValueError(f"Invalid color: {self.color!r}, expected hex like \"#00A0DE\"")

        if self.weight <= 0:
            raise ValueError(f"weight must be > 0, got {self.weight}")

        if not 0.0 <= self.opacity <= 1.0:
            raise ValueError(f"opacity must be in [0.0, 1.0], got {self.opacity}")

        if not 0.0 <= self.fill_opacity <= 1.0:
            raise ValueError(
                f"fill_opacity must be in [0.0, 1.0], got {self.fill_opacity}"
            )

        for dash in self.dash_array.split():
            if not dash.isdigit():
                raise ValueError(f"Invalid dash_array: {self.dash_array!r}")

    @property
    def stroke_rgb(self) -> Tuple[int, int, int]:
        """Stroke color as 0-255 RGB."""
        r, g, b = mcolors.to_rgb(self.color)
        return round(r * 255), round(g * 255), round(b * 255)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the toolkit's path option names."""
        return {
            'color': self.color,
            'weight': self.weight,
            'opacity': self.opacity,
            'dashArray': self.dash_array,
            'fillOpacity': self.fill_opacity,
        }


POLYGON_SHAPE_OPTIONS = PathStyle(
    color="#00A0DE",
    weight=1,
    opacity=1,
    dash_array="6 3",
    fill_opacity=0.25,
)

DRAW_ELEMENT_OPTIONS: Mapping[LayerKind, DrawElementOptions] = MappingProxyType({
    LayerKind.MARKER: DrawElementOptions(
        button_class="leaflet-draw-draw-marker",
        tooltip_text_key="markerTooltip",
        tooltip_cancel_text_key="cancelMarker",
        popup_class="is-marker",
    ),
    LayerKind.POLYGON: DrawElementOptions(
        button_class="leaflet-draw-draw-polygon",
        tooltip_text_key="polygonTooltip",
        tooltip_cancel_text_key="cancelOutline",
        popup_class="is-polygon",
    ),
})

_missing_kinds = set(LayerKind) - set(DRAW_ELEMENT_OPTIONS)
if _missing_kinds:
    raise RuntimeError(
        f"DRAW_ELEMENT_OPTIONS has no entry for: {', '.join(sorted(k.value for k in _missing_kinds))}"
    )

# Vertex handle drawn while a polygon is being outlined
POLYGON_VERTEX_ICON: Mapping[str, Any] = MappingProxyType({
    "iconSize": (7, 7),
    "className": "polygon-marker",
})

GUIDELINE_DISTANCE = 10


def get_draw_options(
    class_name: str = "",
    style: PathStyle = POLYGON_SHAPE_OPTIONS,
) -> Dict[str, Any]:
    """
    Build the drawing toolkit's draw options.

    Only polygons (and the toolkit's default marker) can be drawn;
    polylines, rectangles and circles are switched off.

    Args:
        class_name: Extra CSS class for drawn polygons
        style: Path style of drawn polygons

    Returns:
        Fresh dict, safe for the caller to modify
    """
    return {
        'polyline': False,
        'rectangle': False,
        'circle': False,
        'circlemarker': False,
        'polygon': {
            'icon': dict(POLYGON_VERTEX_ICON),
            'shapeOptions': {
                **style.to_dict(),
                'className': class_name,
            },
            'guidelineDistance': GUIDELINE_DISTANCE,
        },
    }


@dataclass(frozen=True)
class DrawSessionConfig:
    """
    Configuration of one drawing session.

    Immutable after construction (frozen dataclass).
    """

    enabled_kinds: Tuple[LayerKind, ...] = (LayerKind.MARKER, LayerKind.POLYGON)
    shape_style: PathStyle = POLYGON_SHAPE_OPTIONS
    class_name: str = ""

    def __post_init__(self):
        """Validate session configuration."""
        kinds = tuple(LayerKind(kind) for kind in self.enabled_kinds)
        if not kinds:
            raise ValueError("enabled_kinds cannot be empty")
        if len(set(kinds)) != len(kinds):
            raise ValueError(f"enabled_kinds has duplicates: {[k.value for k in kinds]}")
        object.__setattr__(self, 'enabled_kinds', kinds)

    def element_options(self) -> Dict[LayerKind, DrawElementOptions]:
        """Draw element options of the enabled kinds, in enabled order."""
        return {kind: DRAW_ELEMENT_OPTIONS[kind] for kind in self.enabled_kinds}

    def draw_options(self) -> Dict[str, Any]:
        """Toolkit draw options for this session."""
        options = get_draw_options(class_name=self.class_name, style=self.shape_style)
        if LayerKind.POLYGON not in self.enabled_kinds:
            options['polygon'] = False
        if LayerKind.MARKER not in self.enabled_kinds:
            options['marker'] = False
        return options

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "DrawSessionConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            enabled_kinds: ["marker", "polygon"]
            class_name: "is-editable"

            shape_style:
              color: "#00A0DE"
              weight: 1
              opacity: 1
              dash_array: "6 3"
              fill_opacity: 0.25

        Missing keys fall back to the defaults above.
        """
        with open(yaml_path) as f:
            data = yaml.safe_load(f) or {}

        style_data = data.get("shape_style") or {}
        defaults = POLYGON_SHAPE_OPTIONS
        try:
            shape_style = PathStyle(
                color=str(style_data.get("color", defaults.color)),
                weight=float(style_data.get("weight", defaults.weight)),
                opacity=float(style_data.get("opacity", defaults.opacity)),
                dash_array=str(style_data.get("dash_array", defaults.dash_array)),
                fill_opacity=float(style_data.get("fill_opacity", defaults.fill_opacity)),
            )
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid shape_style in {yaml_path}: {e}") from e

        try:
            enabled_kinds = tuple(
                LayerKind(kind)
                for kind in data.get("enabled_kinds", [k.value for k in LayerKind])
            )
        except ValueError as e:
            raise ValueError(f"Invalid enabled_kinds in {yaml_path}: {e}") from e

        config = cls(
            enabled_kinds=enabled_kinds,
            shape_style=shape_style,
            class_name=str(data.get("class_name", "")),
        )

        logger.info(
            event=LogEvent.CONFIG_LOADED,
            message=f"Loaded draw session config from {yaml_path}",
            metadata={
                'path': str(yaml_path),
                'enabled_kinds': [kind.value for kind in config.enabled_kinds],
            }
        )
        return config
