# geomcore/geometry/comparison.py
"""Tolerance-aware scalar comparisons shared by the whole package."""
from typing import Optional
from geomcore.geometry.constants import EPSILON


def resolve_tolerance(tolerance: Optional[float] = None) -> float:
    """Return ``tolerance``, falling back to the package default EPSILON."""
    if tolerance is None:
        return EPSILON
    if tolerance < 0:
        raise ValueError(f"Tolerance must be non-negative, got {tolerance}")
    return tolerance


def is_equal_1d(a: float, b: float, tolerance: Optional[float] = None) -> bool:
    """Check if two scalars differ by no more than the tolerance."""
    return abs(a - b) <= resolve_tolerance(tolerance)


def is_zero(value: float, tolerance: Optional[float] = None) -> bool:
    """Check if a scalar is zero within the tolerance."""
    return is_equal_1d(value, 0.0, tolerance)
