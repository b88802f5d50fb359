# geomcore/predicates/distance.py
from geomcore.geometry.line import Line
from geomcore.geometry.plane import Plane
from geomcore.geometry.vector import Vector, dot_product


def distance_points(a: Vector, b: Vector) -> float:
    """Euclidean distance between two points."""
    return (b - a).magnitude()


def distance_point_line(line: Line, point: Vector) -> float:
    """
    Perpendicular distance from a point to an infinite line (2D or 3D).

    The point is projected onto the line to find the foot of the
    perpendicular; the projection is only correct for a unit direction,
    which Line.through() guarantees.
    """
    t = dot_product(line.direction, point - line.point)
    foot = line.point + line.direction * t
    return (foot - point).magnitude()


def distance_point_plane(plane: Plane, point: Vector) -> float:
    """Signed distance from a point to a plane; negative behind the normal."""
    return dot_product(plane.normal, point) - plane.d
