"""Sampling of quadratic and cubic Bezier curves into point sequences.

The CurveEvaluator walks the curve parameter t from 0 towards 1 in fixed steps
of size `smoothness` and returns the visited curve points. The number of
control points selects the curve degree: 3 points define a quadratic curve,
4 points a cubic curve.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, List, Optional

import numpy as np
from numpy.typing import NDArray

from bezeval.consts import (
    CUBIC_POINT_COUNT,
    DEFAULT_SMOOTHNESS,
    MAX_SAMPLE_COUNT,
    MAX_SMOOTHNESS_EXCLUSIVE,
    MIN_SMOOTHNESS_EXCLUSIVE,
    QUADRATIC_POINT_COUNT,
)
from bezeval.curve import Curve, CubicCurve, QuadraticCurve
from bezeval.errors import InvalidConfigurationError, InvalidInputError
from bezeval.geom import Coordinate

logger = logging.getLogger(__name__)


class CurveEvaluator:
    """Evaluator producing a piecewise-linear approximation of a Bezier curve.

    The smoothness (parameter step size) is fixed at construction and must lie
    strictly between 0 and 1. Instances hold no other state and can be reused
    and shared freely.

    Sampling visits t = 0, s, 2*s, ... while t < 1, so the result contains
    ceil(1/s) points starting with the exact start point. The end point is only
    appended when `include_endpoint` is set.
    """

    def __init__(self, smoothness: float = DEFAULT_SMOOTHNESS, include_endpoint: bool = False):
        """Initialize the evaluator.

        Args:
            smoothness: Parameter step size, strictly between 0 and 1
            include_endpoint: If True, append the exact end point B(1) to every sampled curve

        Raises:
            InvalidConfigurationError: If smoothness is not a number strictly between 0 and 1,
                or so small that a curve would exceed MAX_SAMPLE_COUNT samples
        """
        try:
            smoothness = float(smoothness)
        except (TypeError, ValueError) as exc:
            raise InvalidConfigurationError(f"Smoothness must be a number, got {smoothness!r}") from exc
        # also rejects NaN
        if not MIN_SMOOTHNESS_EXCLUSIVE < smoothness < MAX_SMOOTHNESS_EXCLUSIVE:
            raise InvalidConfigurationError(
                f"Smoothness must be between {MIN_SMOOTHNESS_EXCLUSIVE} and {MAX_SMOOTHNESS_EXCLUSIVE} "
                f"(both non-inclusive), got {smoothness}"
            )
        if 1.0 / smoothness > MAX_SAMPLE_COUNT:
            raise InvalidConfigurationError(
                f"Smoothness {smoothness} would produce more than {MAX_SAMPLE_COUNT} samples per curve"
            )
        self._smoothness = smoothness
        self._include_endpoint = bool(include_endpoint)
        logger.debug("Created %s", self)

    @property
    def smoothness(self) -> float:
        """float: The parameter step size used for sampling."""
        return self._smoothness

    @property
    def include_endpoint(self) -> bool:
        """bool: Whether the exact end point is appended to sampled curves."""
        return self._include_endpoint

    def sample_parameters(self) -> NDArray[np.float64]:
        """
        The curve parameter values visited during sampling.

        Values are computed as i * smoothness (not by repeated addition) so that
        rounding errors do not accumulate along the curve.

        Returns:
            NDArray[np.float64]: ascending parameter values, starting at 0.0
        """
        # one extra candidate guards against 1/smoothness rounding down
        candidates = np.arange(math.ceil(1.0 / self._smoothness) + 1, dtype=np.float64) * self._smoothness
        params = candidates[candidates < 1.0]
        if self._include_endpoint:
            params = np.append(params, 1.0)
        return params

    def evaluate(self, curve: Curve) -> List[Coordinate]:
        """
        Sample an explicit quadratic or cubic curve.

        Args:
            curve: A QuadraticCurve or CubicCurve

        Returns:
            List[Coordinate]: the sampled points in curve-traversal order
        """
        return self._to_coordinates(self._evaluate_array(curve))

    def calculate_curve(self, points: Optional[Iterable]) -> Optional[List[Coordinate]]:
        """
        Sample the Bezier curve defined by the given control points.

        Args:
            points: Ordered control points as Coordinates or (x, y) pairs.
                Exactly 4 points define a cubic curve, otherwise the first
                3 points define a quadratic curve and the rest are ignored.

        Returns:
            List[Coordinate]: the sampled points in curve-traversal order, or
            None if fewer than 3 control points were given

        Raises:
            InvalidInputError: If points is None or a point is malformed
        """
        points_array = self.calculate_curve_array(points)
        if points_array is None:
            return None
        return self._to_coordinates(points_array)

    def calculate_curve_array(self, points: Optional[Iterable]) -> Optional[NDArray[np.float64]]:
        """
        Sample the Bezier curve defined by the given control points into an array.

        Same semantics as calculate_curve.

        Returns:
            NDArray[np.float64] of shape (n, 2) containing the sampled points (x, y),
            or None if fewer than 3 control points were given

        Raises:
            InvalidInputError: If points is None or a point is malformed
        """
        curve = self._curve_from_control_points(points)
        if curve is None:
            return None
        return self._evaluate_array(curve)

    def _evaluate_array(self, curve: Curve) -> NDArray[np.float64]:
        if not isinstance(curve, (QuadraticCurve, CubicCurve)):
            raise InvalidInputError(f"Expected a QuadraticCurve or CubicCurve, got {type(curve).__name__}")
        return curve.points_at(self.sample_parameters())

    @staticmethod
    def _curve_from_control_points(points: Optional[Iterable]) -> Optional[Curve]:
        if points is None:
            raise InvalidInputError("Provided control point sequence has no reference")
        try:
            points = list(points)
        except TypeError as exc:
            raise InvalidInputError(f"Control points must be iterable, got {type(points).__name__}") from exc

        if len(points) < QUADRATIC_POINT_COUNT:
            logger.debug("Got %d control points, at least %d required", len(points), QUADRATIC_POINT_COUNT)
            return None
        # only exactly 4 points select the cubic curve
        count = CUBIC_POINT_COUNT if len(points) == CUBIC_POINT_COUNT else QUADRATIC_POINT_COUNT
        if len(points) > count:
            logger.debug("Ignoring %d control points beyond the first %d", len(points) - count, count)

        coords = [Coordinate.from_sequence(point) for point in points[:count]]
        if not all(coord.is_finite() for coord in coords):
            logger.debug("Non-finite control points %s", [str(coord) for coord in coords])
        if count == CUBIC_POINT_COUNT:
            return CubicCurve(*coords)
        return QuadraticCurve(*coords)

    @staticmethod
    def _to_coordinates(points_array: NDArray[np.float64]) -> List[Coordinate]:
        return [Coordinate(x, y) for x, y in points_array.tolist()]

    def __repr__(self):
        return f"CurveEvaluator(smoothness={self._smoothness}, include_endpoint={self._include_endpoint})"


def main():
    """Print a sampled quadratic and cubic curve."""
    evaluator = CurveEvaluator(0.25, include_endpoint=True)

    quadratic = [Coordinate(0.0, 0.0), Coordinate(50.0, 200.0), Coordinate(200.0, 0.0)]
    print("quadratic:")
    for point in evaluator.calculate_curve(quadratic):
        print("   ", point)

    cubic = [Coordinate(0.0, 0.0), Coordinate(50.0, 200.0), Coordinate(150.0, -100.0), Coordinate(200.0, 0.0)]
    print("cubic:")
    for point in evaluator.calculate_curve(cubic):
        print("   ", point)


if __name__ == "__main__":
    main()
