"""Closed-form evaluation of quadratic and cubic Bezier curves."""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np
from numpy.typing import NDArray

from bezeval.geom import Coordinate

ParameterValues = Union[Sequence[float], NDArray[np.float64]]


class BezierCurve:
    """Class to handle quadratic and cubic Bezier curve evaluation.

    Provides the closed-form Bernstein formulas both for a single parameter
    value (pure Python) and for an array of parameter values (NumPy).
    """

    @staticmethod
    def quadratic_point(src: Coordinate, ctrl: Coordinate, dst: Coordinate, t: float) -> Coordinate:
        """
        Evaluate a quadratic Bezier curve at parameter t.

        B(t) = (1-t)^2*P0 + 2*t*(1-t)*P1 + t^2*P2

        Args:
            src: Start point P0
            ctrl: Control point P1
            dst: End point P2
            t: Curve parameter in [0, 1]

        Returns:
            Coordinate: the point on the curve, exactly src for t=0 and exactly dst for t=1
        """
        omt = 1.0 - t
        w0 = omt * omt
        w1 = 2.0 * t * omt
        w2 = t * t
        return Coordinate(
            w0 * src.x + w1 * ctrl.x + w2 * dst.x,
            w0 * src.y + w1 * ctrl.y + w2 * dst.y,
        )

    @staticmethod
    def cubic_point(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        src: Coordinate,
        ctrl1: Coordinate,
        ctrl2: Coordinate,
        dst: Coordinate,
        t: float,
    ) -> Coordinate:
        """
        Evaluate a cubic Bezier curve at parameter t.

        B(t) = (1-t)^3*P0 + 3*t*(1-t)^2*P1 + 3*t^2*(1-t)*P2 + t^3*P3

        Args:
            src: Start point P0
            ctrl1: First control point P1
            ctrl2: Second control point P2
            dst: End point P3
            t: Curve parameter in [0, 1]

        Returns:
            Coordinate: the point on the curve, exactly src for t=0 and exactly dst for t=1
        """
        omt = 1.0 - t
        omt2 = omt * omt
        w0 = omt2 * omt
        w1 = 3.0 * t * omt2
        w2 = 3.0 * t * t * omt
        w3 = t * t * t
        return Coordinate(
            w0 * src.x + w1 * ctrl1.x + w2 * ctrl2.x + w3 * dst.x,
            w0 * src.y + w1 * ctrl1.y + w2 * ctrl2.y + w3 * dst.y,
        )

    @classmethod
    def quadratic_points(cls, points: Sequence[Coordinate], t: ParameterValues) -> NDArray[np.float64]:
        """
        Evaluate a quadratic Bezier curve at many parameter values using NumPy.

        Args:
            points: Exactly 3 control points: start, control, end
            t: Parameter values in [0, 1]

        Returns:
            NDArray[np.float64] of shape (len(t), 2) containing the curve points (x, y)
        """
        points_array = cls._to_array(points)
        t = np.asarray(t, dtype=np.float64)

        # Quadratic Bezier basis functions
        omt = 1.0 - t
        w0 = omt * omt
        w1 = 2.0 * t * omt
        w2 = t * t

        result = np.empty((len(t), 2), dtype=np.float64)
        result[:, 0] = w0 * points_array[0, 0] + w1 * points_array[1, 0] + w2 * points_array[2, 0]
        result[:, 1] = w0 * points_array[0, 1] + w1 * points_array[1, 1] + w2 * points_array[2, 1]
        return result

    @classmethod
    def cubic_points(cls, points: Sequence[Coordinate], t: ParameterValues) -> NDArray[np.float64]:
        """
        Evaluate a cubic Bezier curve at many parameter values using NumPy.

        Args:
            points: Exactly 4 control points: start, control1, control2, end
            t: Parameter values in [0, 1]

        Returns:
            NDArray[np.float64] of shape (len(t), 2) containing the curve points (x, y)
        """
        points_array = cls._to_array(points)
        t = np.asarray(t, dtype=np.float64)

        # Cubic Bezier basis functions
        omt = 1.0 - t
        omt2 = omt * omt
        w0 = omt2 * omt
        w1 = 3.0 * t * omt2
        w2 = 3.0 * t * t * omt
        w3 = t * t * t

        result = np.empty((len(t), 2), dtype=np.float64)
        result[:, 0] = (
            w0 * points_array[0, 0] + w1 * points_array[1, 0] + w2 * points_array[2, 0] + w3 * points_array[3, 0]
        )
        result[:, 1] = (
            w0 * points_array[0, 1] + w1 * points_array[1, 1] + w2 * points_array[2, 1] + w3 * points_array[3, 1]
        )
        return result

    @staticmethod
    def _to_array(points: Sequence[Coordinate]) -> NDArray[np.float64]:
        return np.array([(point.x, point.y) for point in points], dtype=np.float64)
