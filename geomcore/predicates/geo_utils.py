# geomcore/predicates/geo_utils.py
"""2D orientation, collinearity and coplanarity predicates."""
from enum import IntEnum
from geomcore.geometry.comparison import resolve_tolerance, is_zero
from geomcore.geometry.constants import R2, X, Y
from geomcore.geometry.vector import (
    Vector,
    cross_product_r2,
    cross_product_r3,
    scalar_triple_product,
)


class RelativePosition(IntEnum):
    """Position of a point c relative to a directed segment a -> b."""
    LEFT = 1          # c is to the left of ab
    RIGHT = -1        # c is to the right of ab
    BEHIND = 2        # c is on the line, before a
    BEYOND = 3        # c is on the line, past b
    ORIGIN = 0        # c coincides with a
    DESTINATION = 4   # c coincides with b
    BETWEEN = 5       # c is on the segment strictly between a and b


# Positions that put c on the closed segment ab
ON_SEGMENT = frozenset({RelativePosition.ORIGIN, RelativePosition.DESTINATION, RelativePosition.BETWEEN})


def area_triangle_2d(a: Vector, b: Vector, c: Vector) -> float:
    """
    Signed area of the triangle a, b, c.

    Positive when the points are ordered counter-clockwise, negative when
    clockwise, zero when collinear.
    """
    return cross_product_r2(b - a, c - a) / 2


def orientation_2d(a: Vector, b: Vector, c: Vector, tolerance: float = None) -> RelativePosition:
    """
    Classify point c relative to the directed segment a -> b.

    Off the line the answer is LEFT or RIGHT by the sign of the signed area.
    For collinear points the checks run in a fixed order, and callers rely
    on it: BEHIND, then BEYOND, then ORIGIN, then DESTINATION, else BETWEEN.

    Args:
        a: Segment origin
        b: Segment destination
        c: Point to classify
        tolerance: Area below which the points count as collinear, and the
                   tolerance for the ORIGIN/DESTINATION coincidence tests

    Returns:
        The RelativePosition of c
    """
    tolerance = resolve_tolerance(tolerance)
    area = area_triangle_2d(a, b, c)

    if area > tolerance:
        return RelativePosition.LEFT
    if area < -tolerance:
        return RelativePosition.RIGHT

    ab = b - a
    ac = c - a
    if ab[X] * ac[X] < 0 or ab[Y] * ac[Y] < 0:
        return RelativePosition.BEHIND
    if ab.magnitude() < ac.magnitude():
        return RelativePosition.BEYOND
    if c.is_close(a, tolerance):
        return RelativePosition.ORIGIN
    if c.is_close(b, tolerance):
        return RelativePosition.DESTINATION
    return RelativePosition.BETWEEN


def collinear(a: Vector, b: Vector, tolerance: float = None) -> bool:
    """
    Check if two vectors are parallel or anti-parallel.

    The zero vector is collinear with every vector, itself included.
    """
    if a.dimension == R2 and b.dimension == R2:
        return is_zero(cross_product_r2(a, b), tolerance)
    return cross_product_r3(a, b).is_zero(tolerance)


def collinear_points(a: Vector, b: Vector, c: Vector, tolerance: float = None) -> bool:
    """Check if three points lie on one line."""
    return collinear(b - a, c - a, tolerance)


def coplanar(u: Vector, v: Vector, w: Vector, tolerance: float = None) -> bool:
    """Check if three 3D vectors lie in one plane (zero scalar triple product)."""
    return is_zero(scalar_triple_product(u, v, w), tolerance)


def coplanar_points(a: Vector, b: Vector, c: Vector, d: Vector, tolerance: float = None) -> bool:
    """Check if four 3D points lie in one plane."""
    return coplanar(b - a, c - a, d - a, tolerance)
