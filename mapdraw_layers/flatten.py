"""
Layer Classifier & Flattener
============================

Stateless normalization of a layer tree into typed leaves.

Design:
- classify(): capability probe over exactly two kinds
- flatten(): depth-first walk, insertion order, groups dropped
- Iterative walk (explicit stack) so nesting depth is unbounded
- Reads groups only through for_each_child(); never mutates the input
"""

from typing import List, Union

from mapdraw_layers.layer import (
    DrawableLayer,
    LayerGroup,
    LayerKind,
    create_layer_group,
)

# Capabilities only polygon layers expose
POLYGON_CAPABILITIES = ("ring", "area")


def classify(layer: DrawableLayer) -> LayerKind:
    """
    Classify a leaf layer by what it can do.

    Returns:
        LayerKind.POLYGON if the layer exposes ring and area, else
        LayerKind.MARKER
    """
    if all(hasattr(layer, capability) for capability in POLYGON_CAPABILITIES):
        return LayerKind.POLYGON
    return LayerKind.MARKER


def _children(group: LayerGroup) -> List[Union[DrawableLayer, LayerGroup]]:
    children: List[Union[DrawableLayer, LayerGroup]] = []
    group.for_each_child(children.append)
    return children


def flatten(root: Union[DrawableLayer, LayerGroup]) -> List[DrawableLayer]:
    """
    Collect every leaf layer under root, depth-first.

    Children keep the order they were added to their group. Groups never
    appear in the result; empty groups contribute nothing. A leaf root
    yields a one-element list.

    Example:
        >>> flatten(create_layer_group([a, create_layer_group([b, c]), d]))
        [a, b, c, d]
    """
    leaves: List[DrawableLayer] = []
    stack: List[Union[DrawableLayer, LayerGroup]] = [root]

    while stack:
        node = stack.pop()
        if isinstance(node, LayerGroup):
            # Reversed so the first child is popped first
            stack.extend(reversed(_children(node)))
        else:
            leaves.append(node)

    return leaves


def collect(root: Union[DrawableLayer, LayerGroup]) -> LayerGroup:
    """Same walk as flatten(), returned as a new flat group."""
    return create_layer_group(flatten(root))
