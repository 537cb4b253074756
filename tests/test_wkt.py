"""Tests for mapdraw_geometry/wkt.py."""
import pytest
import shapely

from mapdraw_geometry import (
    GeometryError,
    ParseError,
    Point,
    Polygon,
    UnsupportedGeometryError,
    decode,
    encode,
    from_shape,
    to_shape,
)


# --- end to end ---

def test_point_end_to_end():
    geometry = decode("POINT (10 20)")
    assert geometry == Point(10, 20)
    assert encode(geometry) == "POINT (10 20)"


def test_polygon_end_to_end():
    text = "POLYGON ((0 0, 4 0, 4 4, 0 4, 0 0))"
    geometry = decode(text)
    assert isinstance(geometry, Polygon)
    assert geometry.ring == ((0, 0), (4, 0), (4, 4), (0, 4), (0, 0))
    assert encode(geometry) == text


def test_decode_without_space_before_parenthesis():
    assert decode("POINT(1.5 -2.25)") == Point(1.5, -2.25)


def test_decode_keeps_axis_order():
    geometry = decode("POINT (-122.4 37.8)")
    assert geometry.x == -122.4
    assert geometry.y == 37.8


# --- round trips ---

@pytest.mark.parametrize("point", [
    Point(0, 0),
    Point(-179.999999, 89.123456789),
    Point(13.404954, 52.520008),
])
def test_point_round_trip(point):
    decoded = decode(encode(point))
    assert isinstance(decoded, Point)
    assert abs(decoded.x - point.x) < 1e-9
    assert abs(decoded.y - point.y) < 1e-9


def test_polygon_round_trip_keeps_length_and_closure():
    polygon = Polygon(ring=((13.1, 52.2), (13.5, 52.2), (13.5, 52.6), (13.3, 52.8)))
    decoded = decode(encode(polygon))
    assert isinstance(decoded, Polygon)
    assert len(decoded.ring) == len(polygon.ring) == 5
    assert decoded.ring[0] == decoded.ring[-1]


def test_encode_closes_ring():
    polygon = Polygon(ring=((0, 0), (1, 0), (1, 1)))
    assert encode(polygon) == "POLYGON ((0 0, 1 0, 1 1, 0 0))"


# --- errors ---

def test_non_numeric_coordinates():
    with pytest.raises(ParseError) as exc_info:
        decode("POINT (a b)")
    assert exc_info.value.text == "POINT (a b)"


def test_linestring_unsupported():
    with pytest.raises(UnsupportedGeometryError) as exc_info:
        decode("LINESTRING (0 0, 1 1)")
    assert exc_info.value.geometry_type == "LineString"


def test_unsupported_is_not_parse_error():
    with pytest.raises(UnsupportedGeometryError) as exc_info:
        decode("MULTIPOINT ((0 0), (1 1))")
    assert not isinstance(exc_info.value, ParseError)
    assert isinstance(exc_info.value, GeometryError)


def test_unknown_keyword():
    with pytest.raises(ParseError, match="Unknown geometry keyword"):
        decode("CIRCLE (0 0, 5)")


@pytest.mark.parametrize("text", [
    "POINT (1 2",
    "POLYGON ((0 0, 4 0, 4 4, 0 0)",
    "POINT (1)",
    "POINT (1 2 3)",
    "",
    "(1 2)",
    "POINT (nan nan)",
    "POINT (1e400 0)",
    "POLYGON ((0 0, 1 1, 0 0))",
])
def test_malformed_text(text):
    with pytest.raises(ParseError):
        decode(text)


def test_unclosed_ring_in_text():
    with pytest.raises(ParseError):
        decode("POLYGON ((0 0, 4 0, 4 4, 0 4))")


def test_decode_non_string():
    with pytest.raises(ParseError, match="Expected WKT string"):
        decode(None)


def test_empty_geometry_unsupported():
    with pytest.raises(UnsupportedGeometryError, match="Empty"):
        decode("POINT EMPTY")


def test_polygon_with_hole_unsupported():
    with pytest.raises(UnsupportedGeometryError, match="interior rings"):
        decode("POLYGON ((0 0, 10 0, 10 10, 0 10, 0 0), (2 2, 3 2, 3 3, 2 2))")


def test_encode_rejects_other_types():
    with pytest.raises(TypeError):
        encode("POINT (1 2)")


# --- shapely bridge ---

def test_to_shape_and_back(square):
    shape = to_shape(square)
    assert shape.geom_type == "Polygon"
    assert abs(shape.area - square.area) < 1e-12
    assert from_shape(shape) == square


def test_from_shape_rejects_linestring():
    with pytest.raises(UnsupportedGeometryError):
        from_shape(shapely.LineString([(0, 0), (1, 1)]))
