# geomcore/geometry/constants.py
"""Constants for geometric calculations."""

# Default tolerance for floating-point comparisons
EPSILON = 1e-7

# Axis positions
X = 0
Y = 1
Z = 2

R2 = 2
R3 = 3
SUPPORTED_DIMENSIONS = (R2, R3)
