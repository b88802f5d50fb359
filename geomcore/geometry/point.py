# geomcore/geometry/point.py
from geomcore.geometry.constants import EPSILON
from geomcore.geometry.vector import Vector


class Point(Vector):
    """
    Represents a 2D or 3D position in Cartesian coordinates.

    A Point has exactly the representation of a Vector and supports the same
    algebra; it only documents that the coordinates are an absolute position
    rather than a direction.
    """

    def distance_to(self, other: Vector) -> float:
        """Calculate the Euclidean distance to another point."""
        return (self - other).magnitude()

    def is_close_to(self, other: Vector, tolerance: float = None) -> bool:
        """
        Check if this point is close to another point within the specified tolerance.

        This bounds the Euclidean distance between the points, unlike ``==``
        and is_close(), which bound each coordinate difference separately.
        Points that are equal under ``==`` can therefore be up to
        ``tolerance * sqrt(dimension)`` apart and fail this check.

        Args:
            other: The point to compare with
            tolerance: Maximum distance between points to be considered equal.
                      If None, uses the default EPSILON value.

        Returns:
            True if points are within the tolerance distance of each other
        """
        if tolerance is None:
            tolerance = EPSILON
        return self.distance_to(other) <= tolerance

    def midpoint(self, other: Vector) -> "Point":
        """Calculate the midpoint between this point and another point."""
        return (self + other) / 2

    def __str__(self) -> str:
        """String representation of the point."""
        return self.format_as_tuple()
