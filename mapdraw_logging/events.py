"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for structured logging.

Event Naming Convention:
    <component>.<action>

    component: wkt, scene, tooltip, config
    action: decoded, exported, augmented, loaded, ...

Example Log Query (CloudWatch Insights):
    fields @timestamp, event, message, metadata.layer_count
    | filter event = "scene.exported"
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - wkt.*: Geometry codec
    - scene.*: Layer tree normalization and interchange
    - tooltip.*: Draw control augmentation
    - config.*: Draw session configuration
    """

    # ========== Codec Events ==========
    WKT_DECODE_FAILED = "wkt.decode_failed"
    """Geometry text rejected (malformed or unsupported)."""

    # ========== Scene Events ==========
    SCENE_EXPORTED = "scene.exported"
    """Leaf layers serialized to geometry text."""

    SCENE_IMPORTED = "scene.imported"
    """Geometry text deserialized into a layer group."""

    SCENE_EDITING_TOGGLED = "scene.editing_toggled"
    """Editing enabled or disabled on every leaf layer."""

    # ========== Tooltip Events ==========
    TOOLTIP_AUGMENTED = "tooltip.augmented"
    """Control element wrapped with a custom tooltip."""

    TOOLTIP_CONTROL_MISSING = "tooltip.control_missing"
    """Control element not rendered yet, augmentation skipped."""

    # ========== Config Events ==========
    CONFIG_LOADED = "config.loaded"
    """Draw session configuration loaded from YAML."""


# Event categories for filtering
CODEC_EVENTS = {
    LogEvent.WKT_DECODE_FAILED,
}

SCENE_EVENTS = {
    LogEvent.SCENE_EXPORTED,
    LogEvent.SCENE_IMPORTED,
    LogEvent.SCENE_EDITING_TOGGLED,
}

TOOLTIP_EVENTS = {
    LogEvent.TOOLTIP_AUGMENTED,
    LogEvent.TOOLTIP_CONTROL_MISSING,
}
