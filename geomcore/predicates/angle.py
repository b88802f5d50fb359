# geomcore/predicates/angle.py
import logging
import math
from geomcore.geometry.comparison import resolve_tolerance
from geomcore.geometry.line import Line
from geomcore.geometry.plane import Plane
from geomcore.geometry.vector import Vector, dot_product

logger = logging.getLogger(__name__)


def angle_between(u: Vector, v: Vector, tolerance: float = None) -> float:
    """
    Angle in degrees between two undirected directions.

    The absolute value of the cosine is used, so the result is always the
    acute (or right) angle in [0, 90]: lines and planes have no preferred
    orientation. If either vector has a magnitude below the tolerance the
    angle is undefined and 0 is returned; this is the contract for
    degenerate input, not a failure.

    Args:
        u: First direction
        v: Second direction
        tolerance: Magnitude below which a direction counts as degenerate

    Returns:
        The angle in degrees
    """
    tolerance = resolve_tolerance(tolerance)
    mag_u = u.magnitude()
    mag_v = v.magnitude()

    if mag_u < tolerance or mag_v < tolerance:
        logger.debug(f"Angle with degenerate direction {u} or {v} taken as 0")
        return 0.0

    cos_theta = abs(dot_product(u, v)) / (mag_u * mag_v)
    # Rounding can push the cosine slightly outside [0, 1]
    clamped = min(1.0, max(0.0, cos_theta))
    return math.degrees(math.acos(clamped))


def angle_lines_2d(l1: Line, l2: Line, tolerance: float = None) -> float:
    """Angle in degrees between two 2D lines."""
    return angle_between(l1.direction, l2.direction, tolerance)


def angle_lines_3d(l1: Line, l2: Line, tolerance: float = None) -> float:
    """Angle in degrees between two 3D lines."""
    return angle_between(l1.direction, l2.direction, tolerance)


def angle_planes(p1: Plane, p2: Plane, tolerance: float = None) -> float:
    """Dihedral angle in degrees between two planes, taken between their normals."""
    return angle_between(p1.normal, p2.normal, tolerance)


def angle_line_plane(line: Line, plane: Plane, tolerance: float = None) -> float:
    """
    Angle in degrees between a 3D line and a plane.

    This is the complement of the angle between the line direction and the
    plane normal: 0 for a line lying in (or parallel to) the plane, 90 for a
    line along the normal. A degenerate line direction gives 0.
    """
    if line.direction.magnitude() < resolve_tolerance(tolerance):
        logger.debug(f"Angle between degenerate line {line} and plane taken as 0")
        return 0.0
    return 90.0 - angle_between(line.direction, plane.normal, tolerance)
