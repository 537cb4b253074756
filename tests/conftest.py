"""Shared fixtures for layer tree tests."""
import pytest

from mapdraw_geometry import Point, Polygon
from mapdraw_layers import MarkerLayer, PolygonLayer, create_layer_group


@pytest.fixture
def square():
    """4x4 square polygon, closed ring."""
    return Polygon(ring=((0, 0), (4, 0), (4, 4), (0, 4), (0, 0)))


@pytest.fixture
def marker_a():
    return MarkerLayer(Point(1, 1))


@pytest.fixture
def polygon_b(square):
    return PolygonLayer(square)


@pytest.fixture
def marker_c():
    return MarkerLayer(Point(3, 3))


@pytest.fixture
def marker_d():
    return MarkerLayer(Point(-5, 7.5))


@pytest.fixture
def nested_scene(marker_a, polygon_b, marker_c, marker_d):
    """Group [A, subgroup[B, C], D]."""
    return create_layer_group([
        marker_a,
        create_layer_group([polygon_b, marker_c]),
        marker_d,
    ])
