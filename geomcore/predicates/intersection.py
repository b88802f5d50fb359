# geomcore/predicates/intersection.py
"""
Segment, line and plane intersections.

Constructors return the intersection, or None when there is no unique
result (parallel or coincident input). None is the documented outcome for
degenerate geometry; nothing is raised and no argument is modified.
"""
import logging
from typing import Optional
from geomcore.geometry.comparison import is_zero
from geomcore.geometry.constants import X, Y
from geomcore.geometry.line import Line
from geomcore.geometry.plane import Plane
from geomcore.geometry.point import Point
from geomcore.geometry.vector import Vector, cross_product_r3, dot_product
from geomcore.predicates.geo_utils import ON_SEGMENT, RelativePosition, orientation_2d

logger = logging.getLogger(__name__)


def segments_intersect(a: Vector, b: Vector, c: Vector, d: Vector, tolerance: float = None) -> bool:
    """
    Check if the 2D segments ab and cd intersect, touching included.

    Args:
        a: Start of the first segment
        b: End of the first segment
        c: Start of the second segment
        d: End of the second segment
        tolerance: Collinearity tolerance passed to orientation_2d

    Returns:
        True if the segments cross, touch at an endpoint or overlap
    """
    ab_c = orientation_2d(a, b, c, tolerance)
    ab_d = orientation_2d(a, b, d, tolerance)
    cd_a = orientation_2d(c, d, a, tolerance)
    cd_b = orientation_2d(c, d, b, tolerance)

    # An endpoint on the other segment means touching or overlapping
    if {ab_c, ab_d, cd_a, cd_b} & ON_SEGMENT:
        return True

    # Proper crossing: each segment's endpoints straddle the other's line
    return ((ab_c == RelativePosition.LEFT) != (ab_d == RelativePosition.LEFT)
            and (cd_a == RelativePosition.LEFT) != (cd_b == RelativePosition.LEFT))


def lines_intersection(a: Vector, b: Vector, c: Vector, d: Vector,
                       tolerance: float = None) -> Optional[Point]:
    """
    Intersection point of the infinite 2D lines through a, b and through c, d.

    Uses the normal n of cd (cd rotated by 90 degrees): the first line
    ``a + t(b - a)`` meets the second where ``n . (a + t(b - a) - c) == 0``.

    Returns:
        The intersection point, or None if the lines are parallel or coincident
    """
    ab = b - a
    cd = d - c
    n = Vector.from_xy(cd[Y], -cd[X])

    denominator = dot_product(n, ab)
    if is_zero(denominator, tolerance):
        logger.debug(f"Lines through {a}, {b} and {c}, {d} are parallel")
        return None

    t = dot_product(n, c - a) / denominator
    return Point(coordinates=list((a + ab * t).coordinates))


def intersect_lines_2d(l1: Line, l2: Line, tolerance: float = None) -> Optional[Point]:
    """Intersection point of two infinite 2D lines, None if parallel."""
    return lines_intersection(
        l1.point, l1.point + l1.direction,
        l2.point, l2.point + l2.direction,
        tolerance,
    )


def intersect_line_plane(line: Line, plane: Plane, tolerance: float = None) -> Optional[Point]:
    """
    Intersection point of a 3D line and a plane.

    Returns:
        The intersection point, or None if the line is parallel to the plane
        (including the case where it lies in the plane)
    """
    nd = dot_product(plane.normal, line.direction)
    if is_zero(nd, tolerance):
        logger.debug(f"{line} is parallel to {plane}")
        return None

    t = (plane.d - dot_product(plane.normal, line.point)) / nd
    return line.point_at(t)


def intersect_planes(p1: Plane, p2: Plane, tolerance: float = None) -> Optional[Line]:
    """
    Line of intersection of two planes.

    The direction is the cross product of the normals. The point is the one
    of the form ``a*n1 + b*n2`` that satisfies both plane equations, using
    the unit normals every Plane carries. For nearly parallel planes the
    system divides by ``(n1 . n2)^2 - 1``, close to zero, so the point becomes numerically
    sensitive well before the planes are rejected as parallel.

    Returns:
        The intersection line with a unit direction, or None if the planes
        are parallel or coincident
    """
    n1 = p1.normal
    n2 = p2.normal
    direction = cross_product_r3(n1, n2)
    if direction.is_zero(tolerance):
        logger.debug(f"{p1} and {p2} are parallel")
        return None

    n1n2 = dot_product(n1, n2)
    denominator = n1n2 * n1n2 - 1
    a = (p2.d * n1n2 - p1.d) / denominator
    b = (p1.d * n1n2 - p2.d) / denominator

    point = Point(coordinates=list((n1 * a + n2 * b).coordinates))
    direction.normalize()
    return Line(point=point, direction=direction)
