"""Central module containing constants for Bezier curve sampling"""

from __future__ import annotations

# Default parameter-space step used when sampling a curve
DEFAULT_SMOOTHNESS: float = 0.1

# Smoothness must lie strictly between these bounds
MIN_SMOOTHNESS_EXCLUSIVE: float = 0.0
MAX_SMOOTHNESS_EXCLUSIVE: float = 1.0

# Number of control points defining each supported curve degree
QUADRATIC_POINT_COUNT: int = 3
CUBIC_POINT_COUNT: int = 4

# Upper bound on samples per curve, limits how small smoothness may be
MAX_SAMPLE_COUNT: int = 10_000_000
