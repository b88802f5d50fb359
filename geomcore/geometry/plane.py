# geomcore/geometry/plane.py
import math
from numbers import Real
from typing import Any
from pydantic import Field, field_validator, model_validator
from geomcore.geometry.comparison import is_zero
from geomcore.geometry.constants import EPSILON, R3
from geomcore.geometry.vector import FrozenVector, Vector, cross_product_r3, dot_product
from geomcore.utils.base_model import ImmutableModel


class Plane(ImmutableModel):
    """
    Represents a plane in 3D as the set of points p with ``normal . p == d``.

    The normal is always stored with unit length: a longer or shorter normal
    is scaled on construction and d is scaled by the same factor, so the
    plane itself is unchanged and d is its signed distance from the origin.
    The normal is a FrozenVector and cannot be modified through the plane.
    """
    normal: FrozenVector = Field(description="Unit normal vector")
    d: float = Field(description="Signed offset such that normal . p == d on the plane")

    @model_validator(mode="before")
    @classmethod
    def scale_to_unit_normal(cls, data: Any) -> Any:
        """Divide the normal and d by the length of the normal."""
        if not isinstance(data, dict):
            return data
        normal = data.get("normal")
        d = data.get("d")
        if isinstance(normal, Vector):
            normal = normal.coordinates
        elif isinstance(normal, dict):
            normal = normal.get("coordinates")
        # Anything malformed is left to the field validators to report
        if not isinstance(normal, (list, tuple)) or not isinstance(d, Real):
            return data
        if not all(isinstance(c, Real) for c in normal):
            return data
        mag = math.sqrt(sum(float(c) * float(c) for c in normal))
        if not math.isfinite(mag) or mag <= EPSILON:
            return data
        return {
            **data,
            "normal": {"coordinates": [c / mag for c in normal]},
            "d": d / mag,
        }

    @field_validator("normal")
    @classmethod
    def validate_normal(cls, v: FrozenVector) -> FrozenVector:
        """Ensure the normal is a non-zero 3D vector."""
        if v.dimension != R3:
            raise ValueError(f"Plane normal must be 3D, got {v.dimension}D")
        if v.is_zero():
            raise ValueError("Plane normal cannot be a zero vector")
        return v

    @classmethod
    def from_normal_and_point(cls, normal: Vector, point: Vector) -> "Plane":
        """Create the plane with the given normal passing through a point."""
        return cls(normal=normal, d=dot_product(normal, point))

    @classmethod
    def from_points(cls, a: Vector, b: Vector, c: Vector) -> "Plane":
        """
        Create the plane through three points.

        The normal follows the right-hand rule for the order a, b, c.

        Raises:
            ValueError: If the points are collinear and span no plane
        """
        normal = cross_product_r3(b - a, c - a)
        if normal.is_zero():
            raise ValueError(f"Points {a}, {b} and {c} are collinear and do not define a plane")
        return cls.from_normal_and_point(normal, a)

    def contains(self, point: Vector, tolerance: float = None) -> bool:
        """Check if a point lies on the plane within the tolerance."""
        return is_zero(dot_product(self.normal, point) - self.d, tolerance)

    def __str__(self) -> str:
        """String representation of the plane."""
        return f"Plane({self.normal.format_as_tuple()} . p = {self.d})"
