"""Tests for the geometry AST models and the Wkt container"""

import dataclasses
import pytest

from wktgeo.core import GeometryType, TokenType
from wktgeo.models import (
    Token,
    Coord,
    Point,
    LineString,
    Polygon,
    MultiPoint,
    MultiLineString,
    MultiPolygon,
    GeometryCollection,
    Wkt,
)


class TestCoord:
    """Tests for Coord"""

    def test_optional_ordinates_default_to_none(self):
        coord = Coord(1.0, 2.0)
        assert coord.z is None
        assert coord.m is None

    def test_str(self):
        """Test display form"""
        assert str(Coord(10.0, -20.0)) == "Coord(10.0, -20.0)"

    def test_to_tuple(self):
        assert Coord(3.0, 4.0).to_tuple() == (3.0, 4.0)

    def test_is_immutable(self):
        coord = Coord(1.0, 2.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            coord.x = 5.0


class TestToken:
    """Tests for Token display"""

    def test_str(self):
        assert str(Token(TokenType.WORD, "POINT")) == "word 'POINT'"
        assert str(Token(TokenType.NUMBER, 4.2)) == "number 4.2"
        assert str(Token(TokenType.COMMA)) == "','"


class TestGeometries:
    """Tests for the geometry variants"""

    def test_empty_instances(self):
        """Test default construction gives the EMPTY form of each variant"""
        for geometry in (Point(), LineString(), Polygon(), MultiPoint(),
                         MultiLineString(), MultiPolygon(), GeometryCollection()):
            assert geometry.is_empty

    def test_non_empty_instances(self):
        ring = LineString([Coord(0.0, 0.0), Coord(1.0, 0.0), Coord(1.0, 1.0), Coord(0.0, 0.0)])
        assert not Point(Coord(1.0, 2.0)).is_empty
        assert not ring.is_empty
        assert not Polygon([ring]).is_empty
        assert not GeometryCollection([Point()]).is_empty

    def test_lists_are_stored_as_tuples(self):
        """Test children are normalized to tuples"""
        coords = [Coord(0.0, 0.0), Coord(1.0, 1.0)]
        line = LineString(coords)
        coords.append(Coord(2.0, 2.0))

        assert isinstance(line.coords, tuple)
        assert len(line.coords) == 2

    def test_geometries_are_immutable(self):
        line = LineString([Coord(0.0, 0.0), Coord(1.0, 1.0)])
        with pytest.raises(dataclasses.FrozenInstanceError):
            line.coords = ()

    def test_structural_equality(self):
        assert LineString([Coord(0.0, 0.0)]) == LineString((Coord(0.0, 0.0),))
        assert Point() != MultiPoint()

    def test_polygon_exterior_and_interiors(self):
        """Test ring 0 is the exterior and the rest are interiors"""
        outer = LineString([Coord(8.0, 4.0), Coord(4.0, 0.0), Coord(0.0, 4.0), Coord(8.0, 4.0)])
        inner = LineString([Coord(7.0, 3.0), Coord(4.0, 1.0), Coord(1.0, 4.0), Coord(7.0, 3.0)])
        polygon = Polygon([outer, inner])

        assert polygon.exterior == outer
        assert polygon.interiors == (inner,)

    def test_empty_polygon_has_no_exterior(self):
        assert Polygon().exterior is None
        assert Polygon().interiors == ()

    @pytest.mark.parametrize("geometry, keyword, geometry_type", [
        (Point(), "POINT", GeometryType.POINT),
        (LineString(), "LINESTRING", GeometryType.LINE_STRING),
        (Polygon(), "POLYGON", GeometryType.POLYGON),
        (MultiPoint(), "MULTIPOINT", GeometryType.MULTI_POINT),
        (MultiLineString(), "MULTILINESTRING", GeometryType.MULTI_LINE_STRING),
        (MultiPolygon(), "MULTIPOLYGON", GeometryType.MULTI_POLYGON),
        (GeometryCollection(), "GEOMETRYCOLLECTION", GeometryType.GEOMETRY_COLLECTION),
    ])
    def test_str_is_keyword(self, geometry, keyword, geometry_type):
        """Test display form and geometry type of each variant"""
        assert str(geometry) == keyword
        assert geometry.geometry_type == geometry_type


class TestWkt:
    """Tests for the Wkt container"""

    def test_new_container_is_empty(self):
        wkt = Wkt()
        assert len(wkt) == 0
        assert wkt.first() is None

    def test_add_item(self):
        """Test items are appended in order"""
        wkt = Wkt()
        wkt.add_item(Point(Coord(1.0, 2.0)))
        wkt.add_item(LineString())

        assert len(wkt) == 2
        assert wkt.first() == Point(Coord(1.0, 2.0))
        assert list(wkt) == [Point(Coord(1.0, 2.0)), LineString()]

    def test_from_str(self):
        """Test parsing through the container"""
        wkt = Wkt.from_str("POINT (10 -20)")
        assert wkt.items == [Point(Coord(10.0, -20.0))]
