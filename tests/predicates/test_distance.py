import pytest
from geomcore.geometry.line import Line
from geomcore.geometry.plane import Plane
from geomcore.geometry.point import Point
from geomcore.geometry.vector import Vector
from geomcore.predicates.distance import distance_points, distance_point_line, distance_point_plane


class TestDistancePoints:
    def test_distance_points(self):
        assert distance_points(Point.from_xy(0.0, 0.0), Point.from_xy(3.0, 4.0)) == 5.0
        assert distance_points(Point.from_xyz(1.0, 1.0, 1.0), Point.from_xyz(1.0, 1.0, 1.0)) == 0.0


class TestDistancePointLine:
    def test_point_on_line(self):
        line = Line.through(Point.from_xyz(0.0, 0.0, 0.0), Point.from_xyz(4.0, 0.0, 0.0))
        assert distance_point_line(line, Point.from_xyz(2.0, 0.0, 0.0)) == pytest.approx(0.0)
        # Beyond the defining points, the line is infinite
        assert distance_point_line(line, Point.from_xyz(-7.0, 0.0, 0.0)) == pytest.approx(0.0)

    def test_point_off_line_3d(self):
        line = Line.through(Point.from_xyz(0.0, 0.0, 0.0), Point.from_xyz(4.0, 0.0, 0.0))
        assert distance_point_line(line, Point.from_xyz(2.0, 3.0, 4.0)) == pytest.approx(5.0)

    def test_point_off_diagonal_line(self):
        line = Line.through(Point.from_xyz(1.0, 1.0, 0.0), Point.from_xyz(2.0, 2.0, 0.0))
        assert distance_point_line(line, Point.from_xyz(0.0, 2.0, 0.0)) == pytest.approx(2.0 ** 0.5)

    def test_2d_line(self):
        line = Line.through(Point.from_xy(0.0, 1.0), Point.from_xy(5.0, 1.0))
        assert distance_point_line(line, Point.from_xy(2.0, -2.0)) == pytest.approx(3.0)


class TestDistancePointPlane:
    def test_signed_distance(self):
        plane = Plane(normal=Vector.from_xyz(0.0, 0.0, 1.0), d=2.0)
        assert distance_point_plane(plane, Point.from_xyz(5.0, -3.0, 7.0)) == pytest.approx(5.0)
        assert distance_point_plane(plane, Point.from_xyz(0.0, 0.0, -1.0)) == pytest.approx(-3.0)
        assert distance_point_plane(plane, Point.from_xyz(1.0, 1.0, 2.0)) == pytest.approx(0.0)

    def test_oblique_plane(self):
        plane = Plane.from_points(
            Point.from_xyz(1.0, 0.0, 0.0),
            Point.from_xyz(0.0, 1.0, 0.0),
            Point.from_xyz(0.0, 0.0, 1.0),
        )
        assert distance_point_plane(plane, Point.from_xyz(0.0, 0.0, 0.0)) == pytest.approx(-1.0 / 3.0 ** 0.5)
        assert distance_point_plane(plane, Point.from_xyz(1.0, 1.0, 1.0)) == pytest.approx(2.0 / 3.0 ** 0.5)

    def test_plane_with_non_unit_normal(self):
        plane = Plane(normal=Vector.from_xyz(0.0, 0.0, 2.0), d=2.0)
        assert distance_point_plane(plane, Point.from_xyz(0.0, 0.0, 3.0)) == pytest.approx(2.0)
        assert distance_point_plane(plane, Point.from_xyz(1.0, 1.0, 1.0)) == pytest.approx(0.0)
        assert distance_point_plane(plane, Point.from_xyz(0.0, 0.0, -1.0)) == pytest.approx(-2.0)
