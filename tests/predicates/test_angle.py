import pytest
import math
from geomcore.geometry.line import Line
from geomcore.geometry.plane import Plane
from geomcore.geometry.point import Point
from geomcore.geometry.vector import Vector
from geomcore.predicates.angle import (
    angle_between,
    angle_lines_2d,
    angle_lines_3d,
    angle_planes,
    angle_line_plane,
)


class TestAngleBetween:
    def test_perpendicular(self):
        assert angle_between(Vector.from_xy(1.0, 0.0), Vector.from_xy(0.0, 3.0)) == pytest.approx(90.0)

    def test_forty_five_degrees(self):
        assert angle_between(Vector.from_xy(1.0, 0.0), Vector.from_xy(1.0, 1.0)) == pytest.approx(45.0)

    def test_same_direction_is_zero(self):
        u = Vector.from_xyz(0.3, -1.2, 2.5)
        assert angle_between(u, u) == pytest.approx(0.0)

    def test_opposite_directions_are_zero(self):
        assert angle_between(Vector.from_xy(1.0, 0.0), Vector.from_xy(-2.0, 0.0)) == pytest.approx(0.0)

    def test_obtuse_is_folded_to_acute(self):
        # 135 degrees between the directions, 45 between the undirected lines
        assert angle_between(Vector.from_xy(1.0, 0.0), Vector.from_xy(-1.0, 1.0)) == pytest.approx(45.0)

    def test_zero_vector_gives_zero(self):
        assert angle_between(Vector.zeros(3), Vector.from_xyz(1.0, 0.0, 0.0)) == 0.0
        assert angle_between(Vector.from_xyz(1.0, 0.0, 0.0), Vector.zeros(3)) == 0.0
        assert angle_between(Vector.zeros(2), Vector.zeros(2)) == 0.0

    def test_tolerance_controls_degenerate_cutoff(self):
        small = Vector.from_xy(0.0, 1e-3)
        x_axis = Vector.from_xy(1.0, 0.0)
        assert angle_between(small, x_axis) == pytest.approx(90.0)
        assert angle_between(small, x_axis, tolerance=1e-2) == 0.0

    @pytest.mark.parametrize("u, v", [
        ((1.0, 2.0, 3.0), (-4.0, 0.5, 2.0)),
        ((-1.0, -1.0, 0.0), (1.0, 0.0, 0.0)),
        ((0.0, 0.0, 1.0), (0.0, 0.0, -1.0)),
        ((2.0, -3.0, 0.25), (-2.0, 3.0, -0.25)),
    ])
    def test_range_is_zero_to_ninety(self, u, v):
        angle = angle_between(Vector(coordinates=list(u)), Vector(coordinates=list(v)))
        assert 0.0 <= angle <= 90.0

    def test_nearly_parallel_does_not_fail(self):
        # Rounding can push the cosine just above 1
        u = Vector.from_xyz(0.1, 0.2, 0.3)
        v = u * 3.0
        assert angle_between(u, v) == pytest.approx(0.0, abs=1e-4)


class TestLineAndPlaneAngles:
    def test_angle_lines_2d(self):
        l1 = Line.through(Point.from_xy(0.0, 0.0), Point.from_xy(1.0, 0.0))
        l2 = Line.through(Point.from_xy(0.0, 0.0), Point.from_xy(1.0, math.sqrt(3.0)))
        assert angle_lines_2d(l1, l2) == pytest.approx(60.0)

    def test_angle_lines_3d(self):
        l1 = Line.through(Point.from_xyz(0.0, 0.0, 0.0), Point.from_xyz(1.0, 0.0, 0.0))
        l2 = Line.through(Point.from_xyz(5.0, 5.0, 5.0), Point.from_xyz(5.0, 5.0, 9.0))
        assert angle_lines_3d(l1, l2) == pytest.approx(90.0)

    def test_angle_degenerate_line(self):
        p = Point.from_xy(1.0, 1.0)
        l1 = Line.through(p, p)
        l2 = Line.through(Point.from_xy(0.0, 0.0), Point.from_xy(1.0, 0.0))
        assert angle_lines_2d(l1, l2) == 0.0

    def test_angle_planes(self):
        p1 = Plane(normal=Vector.from_xyz(0.0, 0.0, 1.0), d=0.0)
        p2 = Plane.from_normal_and_point(Vector.from_xyz(0.0, 1.0, 1.0), Point.from_xyz(0.0, 0.0, 0.0))
        assert angle_planes(p1, p2) == pytest.approx(45.0)
        assert angle_planes(p1, p1) == pytest.approx(0.0)

    def test_angle_line_plane(self):
        plane = Plane(normal=Vector.from_xyz(0.0, 0.0, 1.0), d=0.0)
        along_normal = Line.through(Point.from_xyz(0.0, 0.0, 0.0), Point.from_xyz(0.0, 0.0, 1.0))
        in_plane = Line.through(Point.from_xyz(0.0, 0.0, 0.0), Point.from_xyz(1.0, 1.0, 0.0))
        diagonal = Line.through(Point.from_xyz(0.0, 0.0, 0.0), Point.from_xyz(1.0, 0.0, 1.0))

        assert angle_line_plane(along_normal, plane) == pytest.approx(90.0)
        assert angle_line_plane(in_plane, plane) == pytest.approx(0.0)
        assert angle_line_plane(diagonal, plane) == pytest.approx(45.0)

    def test_angle_line_plane_degenerate_line(self):
        plane = Plane(normal=Vector.from_xyz(0.0, 0.0, 1.0), d=0.0)
        p = Point.from_xyz(1.0, 2.0, 3.0)
        assert angle_line_plane(Line.through(p, p), plane) == 0.0
