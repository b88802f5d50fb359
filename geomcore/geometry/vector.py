# geomcore/geometry/vector.py
import logging
import math
from numbers import Real
from typing import Any, Iterable, Iterator, List, Optional, Tuple, Union
from pydantic import Field, field_validator
from geomcore.geometry.comparison import resolve_tolerance, is_zero
from geomcore.geometry.constants import R3, SUPPORTED_DIMENSIONS, X, Y, Z
from geomcore.utils.base_model import ValueModel

logger = logging.getLogger(__name__)

Coordinate = Union[int, float]


class Vector(ValueModel):
    """
    Represents a 2D or 3D vector in Cartesian coordinates.

    Coordinates may be integers or floats. Integer components compare exactly,
    anything involving a float compares within the tolerance. All derived
    quantities (magnitude, dot and cross products) are accumulated as floats.

    The vector is a value: arithmetic always returns a new instance, and the
    only in-place mutations are assign(), item assignment and normalize().
    """
    coordinates: List[Coordinate] = Field(description="Coordinates ordered as X, Y[, Z]")

    @field_validator("coordinates")
    @classmethod
    def validate_coordinates(cls, value: List[Coordinate]) -> List[Coordinate]:
        """Validate the dimension and that every coordinate is a finite number."""
        if len(value) not in SUPPORTED_DIMENSIONS:
            raise ValueError(f"Vector dimension must be 2 or 3, got {len(value)}")
        for coordinate in value:
            if not math.isfinite(coordinate):
                raise ValueError(f"Coordinate must be a finite number, got {coordinate}")
        return value

    @classmethod
    def zeros(cls, dimension: int = R3) -> "Vector":
        """Create a zero vector of the given dimension."""
        return cls(coordinates=[0.0] * dimension)

    @classmethod
    def from_xy(cls, x: Coordinate, y: Coordinate) -> "Vector":
        """Create a 2D vector."""
        return cls(coordinates=[x, y])

    @classmethod
    def from_xyz(cls, x: Coordinate, y: Coordinate, z: Coordinate) -> "Vector":
        """Create a 3D vector."""
        return cls(coordinates=[x, y, z])

    @classmethod
    def from_iterable(cls, values: Iterable[Coordinate]) -> "Vector":
        """Create a vector from any iterable of 2 or 3 coordinates."""
        return cls(coordinates=list(values))

    @property
    def dimension(self) -> int:
        return len(self.coordinates)

    @property
    def x(self) -> Coordinate:
        return self[X]

    @property
    def y(self) -> Coordinate:
        return self[Y]

    @property
    def z(self) -> Coordinate:
        return self[Z]

    def _check_axis(self, axis: int) -> None:
        if not 0 <= axis < self.dimension:
            logger.error(f"Vector index {axis} out of bounds for dimension {self.dimension}")
            raise IndexError(f"Vector index {axis} out of bounds for dimension {self.dimension}")

    def __getitem__(self, axis: int) -> Coordinate:
        self._check_axis(axis)
        return self.coordinates[axis]

    def get(self, axis: int, default: Optional[Coordinate] = None) -> Optional[Coordinate]:
        """
        Read a coordinate without raising.

        Args:
            axis: Axis position (0=X, 1=Y, 2=Z)
            default: Value returned when the axis does not exist

        Returns:
            The coordinate, or ``default`` if the axis is out of range
            (the out-of-range read is still reported in the log)
        """
        if not 0 <= axis < self.dimension:
            logger.error(f"Vector index {axis} out of bounds for dimension {self.dimension}")
            return default
        return self.coordinates[axis]

    def assign(self, axis: int, value: Coordinate) -> None:
        """
        Set a single coordinate in place.

        Raises:
            IndexError: If the axis does not exist for this dimension
            ValueError: If the value is not a finite number
        """
        self._check_axis(axis)
        coordinates = list(self.coordinates)
        coordinates[axis] = value
        # Reassign the whole list so the field validator sees the new value
        self.coordinates = coordinates

    def __setitem__(self, axis: int, value: Coordinate) -> None:
        self.assign(axis, value)

    def __len__(self) -> int:
        return self.dimension

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.coordinates)

    def _check_same_dimension(self, other: "Vector") -> None:
        if self.dimension != other.dimension:
            raise ValueError(
                f"Dimension mismatch: {self.dimension}D and {other.dimension}D vectors"
            )

    def is_close(self, other: "Vector", tolerance: float = None) -> bool:
        """
        Component-wise comparison with another vector.

        Integer pairs must match exactly; any pair involving a float matches
        when the absolute difference is within the tolerance. Vectors of
        different dimension are never close.
        """
        if self.dimension != other.dimension:
            return False
        tolerance = resolve_tolerance(tolerance)
        for a, b in zip(self.coordinates, other.coordinates):
            if isinstance(a, int) and isinstance(b, int):
                if a != b:
                    return False
            elif abs(a - b) > tolerance:
                return False
        return True

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.is_close(other)

    def __ne__(self, other: Any) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __lt__(self, other: "Vector") -> bool:
        """Lexicographic ordering; the first differing coordinate decides."""
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_dimension(other)
        for a, b in zip(self.coordinates, other.coordinates):
            if a < b:
                return True
            if a > b:
                return False
        return False

    def __gt__(self, other: "Vector") -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        if self == other:
            return False
        return not self < other

    def __add__(self, other: "Vector") -> "Vector":
        """Vector addition."""
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_dimension(other)
        return self.__class__(coordinates=[a + b for a, b in zip(self.coordinates, other.coordinates)])

    def __sub__(self, other: "Vector") -> "Vector":
        """Vector subtraction."""
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_dimension(other)
        return self.__class__(coordinates=[a - b for a, b in zip(self.coordinates, other.coordinates)])

    def __mul__(self, factor: Real) -> "Vector":
        """Scale by a scalar factor."""
        if not isinstance(factor, Real):
            return NotImplemented
        return self.__class__(coordinates=[c * factor for c in self.coordinates])

    __rmul__ = __mul__

    def __truediv__(self, divisor: Real) -> "Vector":
        if not isinstance(divisor, Real):
            return NotImplemented
        return self.__class__(coordinates=[c / divisor for c in self.coordinates])

    def __neg__(self) -> "Vector":
        return self.__class__(coordinates=[-c for c in self.coordinates])

    def scale(self, factor: float) -> "Vector":
        """Scale the vector by a factor."""
        return self * factor

    def magnitude(self) -> float:
        """Euclidean norm, always returned as a float."""
        return math.sqrt(sum(float(c) * float(c) for c in self.coordinates))

    def is_zero(self, tolerance: float = None) -> bool:
        """Check if the vector has (near) zero length."""
        return is_zero(self.magnitude(), tolerance)

    def normalize(self, tolerance: float = None) -> None:
        """
        Scale the vector to unit length in place.

        A vector whose magnitude is within the tolerance of zero is left
        unchanged. This is the contract for degenerate input, not an error:
        callers that need a unit vector must check is_zero() themselves.
        """
        mag = self.magnitude()
        if mag <= resolve_tolerance(tolerance):
            logger.debug(f"Skipping normalization of degenerate vector {self}")
            return
        self.coordinates = [c / mag for c in self.coordinates]

    def normalized(self, tolerance: float = None) -> "Vector":
        """Return a unit-length copy (unchanged copy for a degenerate vector)."""
        result = self.copy()
        result.normalize(tolerance)
        return result

    def format_as_tuple(self) -> str:
        """Format the coordinates as a tuple string."""
        return "(" + ", ".join(str(c) for c in self.coordinates) + ")"

    def __str__(self) -> str:
        return f"Vector{self.format_as_tuple()}"


class FrozenVector(Vector):
    """
    A Vector that cannot change after creation.

    assign(), item assignment and normalize() raise, and the coordinates are
    held in a tuple. Used where a containing model relies on the vector's
    invariants, such as the unit normal of a Plane.
    """
    model_config = {
        "frozen": True,
    }

    coordinates: Tuple[Coordinate, ...] = Field(description="Coordinates ordered as X, Y[, Z]")

    __hash__ = None

    def copy(self) -> Vector:
        """Return an independent, mutable Vector with the same coordinates."""
        return Vector(coordinates=list(self.coordinates))


def dot_product(a: Vector, b: Vector) -> float:
    """Sum of component-wise products."""
    a._check_same_dimension(b)
    return sum(float(p) * float(q) for p, q in zip(a.coordinates, b.coordinates))


def cross_product_r2(a: Vector, b: Vector) -> float:
    """
    Scalar 2D cross product ``a.x*b.y - a.y*b.x``.

    This is the Z component of the 3D cross product, so it is also defined
    for 3D input (the Z coordinates are ignored).
    """
    a._check_same_dimension(b)
    return float(a[X]) * float(b[Y]) - float(a[Y]) * float(b[X])


def cross_product_r3(a: Vector, b: Vector) -> Vector:
    """Full 3D cross product."""
    if a.dimension != R3 or b.dimension != R3:
        raise ValueError(
            f"3D cross product requires 3D vectors, got {a.dimension}D and {b.dimension}D"
        )
    ax, ay, az = (float(c) for c in a.coordinates)
    bx, by, bz = (float(c) for c in b.coordinates)
    return Vector.from_xyz(
        ay * bz - az * by,
        az * bx - ax * bz,
        ax * by - ay * bx,
    )


def scalar_triple_product(a: Vector, b: Vector, c: Vector) -> float:
    """``a . (b x c)``, six times the signed volume of the tetrahedron they span."""
    return dot_product(a, cross_product_r3(b, c))
