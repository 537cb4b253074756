"""Tests for mapdraw_layers/layer.py and mapdraw_layers/flatten.py."""
import pytest

from mapdraw_geometry import Point, Polygon
from mapdraw_layers import (
    LayerEditingError,
    LayerGroup,
    LayerKind,
    MarkerLayer,
    PolygonLayer,
    classify,
    collect,
    create_layer_group,
    flatten,
)


# --- leaf layers ---

def test_marker_requires_point(square):
    with pytest.raises(TypeError, match="requires a Point"):
        MarkerLayer(square)


def test_polygon_layer_capabilities(polygon_b, square):
    assert polygon_b.kind == LayerKind.POLYGON
    assert polygon_b.ring == list(square.ring)
    assert abs(polygon_b.area - 16.0) < 1e-12


def test_editing_starts_disabled(marker_a):
    assert marker_a.editing.enabled is False
    with pytest.raises(LayerEditingError):
        marker_a.set_geometry(Point(2, 2))


def test_set_geometry_while_editing(marker_a, polygon_b):
    marker_a.editing.enable()
    marker_a.set_geometry(Point(2, 2))
    assert marker_a.geometry == Point(2, 2)

    triangle = Polygon(ring=((0, 0), (1, 0), (0, 1)))
    polygon_b.editing.enable()
    polygon_b.set_geometry(triangle)
    assert polygon_b.geometry is triangle

    polygon_b.editing.disable()
    with pytest.raises(LayerEditingError):
        polygon_b.set_geometry(triangle)


def test_set_geometry_wrong_variant(polygon_b):
    polygon_b.editing.enable()
    with pytest.raises(TypeError):
        polygon_b.set_geometry(Point(0, 0))


# --- groups ---

def test_group_keeps_insertion_order(marker_a, marker_c, marker_d):
    group = LayerGroup()
    group.add_layer(marker_d).add_layer(marker_a).add_layer(marker_c)
    seen = []
    group.for_each_child(seen.append)
    assert seen == [marker_d, marker_a, marker_c]


def test_group_add_twice_and_remove(marker_a, marker_c):
    group = create_layer_group([marker_a, marker_c, marker_a])
    assert len(group) == 2
    group.remove_layer(marker_a)
    assert not group.has_layer(marker_a)
    assert group.has_layer(marker_c)


def test_group_cannot_contain_itself():
    group = LayerGroup()
    with pytest.raises(ValueError):
        group.add_layer(group)


# --- classify ---

def test_classify_builtin_layers(marker_a, polygon_b):
    assert classify(polygon_b) == LayerKind.POLYGON
    assert classify(marker_a) == LayerKind.MARKER


def test_classify_by_capability():
    class EngineRing:
        ring = [(0, 0), (1, 0), (1, 1), (0, 0)]
        area = 0.5

    class EngineMarker:
        lat_lng = (0, 0)

    class RingOnly:
        ring = []

    assert classify(EngineRing()) == LayerKind.POLYGON
    assert classify(EngineMarker()) == LayerKind.MARKER
    assert classify(RingOnly()) == LayerKind.MARKER


# --- flatten ---

def test_flatten_order(nested_scene, marker_a, polygon_b, marker_c, marker_d):
    assert flatten(nested_scene) == [marker_a, polygon_b, marker_c, marker_d]


def test_flatten_single_leaf(marker_a):
    assert flatten(marker_a) == [marker_a]


def test_flatten_empty_group():
    assert flatten(LayerGroup()) == []


def test_flatten_skips_empty_nested_groups(marker_a):
    scene = create_layer_group([
        create_layer_group(),
        create_layer_group([create_layer_group(), marker_a]),
    ])
    assert flatten(scene) == [marker_a]


def test_flatten_deep_nesting(marker_a, marker_c):
    group = create_layer_group([marker_c])
    for _ in range(5000):
        group = create_layer_group([group])
    root = create_layer_group([marker_a, group])
    assert flatten(root) == [marker_a, marker_c]


def test_flatten_does_not_mutate(nested_scene):
    before = []
    nested_scene.for_each_child(before.append)
    result = flatten(nested_scene)
    after = []
    nested_scene.for_each_child(after.append)
    assert before == after
    assert len(nested_scene) == 3
    assert len(result) == 4


def test_flatten_returns_new_list_each_call(nested_scene):
    first = flatten(nested_scene)
    first.clear()
    assert len(flatten(nested_scene)) == 4


def test_collect_builds_flat_group(nested_scene, marker_a, polygon_b, marker_c, marker_d):
    flat = collect(nested_scene)
    assert flat is not nested_scene
    children = []
    flat.for_each_child(children.append)
    assert children == [marker_a, polygon_b, marker_c, marker_d]
