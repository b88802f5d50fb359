# geomcore/geometry/line.py
import logging
from pydantic import Field, field_validator, model_validator
from geomcore.geometry.point import Point
from geomcore.geometry.vector import Vector
from geomcore.utils.base_model import ValueModel

logger = logging.getLogger(__name__)


class Line(ValueModel):
    """
    Represents an infinite line in 2D or 3D defined by a point and a direction.

    Angle, distance and line-plane intersection formulas assume a unit
    direction. Line.through() guarantees one; when the direction is set
    manually, re-normalizing it is the caller's responsibility.
    """
    point: Vector = Field(description="A point the line passes through")
    direction: Vector = Field(description="Direction of the line, ideally unit length")

    @field_validator("point", "direction")
    @classmethod
    def copy_vector(cls, v: Vector) -> Vector:
        """Store an independent copy so the caller's vector can change freely."""
        return v.copy()

    @model_validator(mode="after")
    def validate_dimensions(self):
        """Validate that point and direction share a dimension."""
        if self.point.dimension != self.direction.dimension:
            raise ValueError(
                f"Line point is {self.point.dimension}D but direction is "
                f"{self.direction.dimension}D"
            )
        return self

    @classmethod
    def through(cls, p1: Vector, p2: Vector) -> "Line":
        """
        Create the line through two points.

        The direction is ``p2 - p1`` normalized to unit length. Coincident
        points give a zero direction, which normalization leaves unchanged.
        """
        direction = p2 - p1
        if direction.is_zero():
            logger.debug(f"Line through coincident points {p1} and {p2} has no direction")
        direction.normalize()
        return cls(point=Point(coordinates=list(p1.coordinates)),
                   direction=Vector(coordinates=list(direction.coordinates)))

    @property
    def dimension(self) -> int:
        return self.point.dimension

    def point_at(self, t: float) -> Point:
        """Evaluate ``point + t * direction``."""
        return Point(coordinates=list((self.point + self.direction * t).coordinates))

    def is_degenerate(self, tolerance: float = None) -> bool:
        """Check if the direction is (near) zero, so the line has no orientation."""
        return self.direction.is_zero(tolerance)

    def __str__(self) -> str:
        """String representation of the line."""
        return f"Line({self.point.format_as_tuple()} + t{self.direction.format_as_tuple()})"
