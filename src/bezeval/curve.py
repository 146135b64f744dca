"""Explicit quadratic and cubic Bezier curve variants."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from bezeval.bezier import BezierCurve, ParameterValues
from bezeval.consts import CUBIC_POINT_COUNT, QUADRATIC_POINT_COUNT
from bezeval.errors import InvalidInputError
from bezeval.geom import Coordinate


###############################################################################
# QuadraticCurve
###############################################################################
@dataclass(frozen=True)
class QuadraticCurve:
    """
    A quadratic Bezier curve defined by a start, one control and an end point.

    Attributes:
        src (Coordinate): Start point, reached at t=0.
        ctrl (Coordinate): Control point bending the curve.
        dst (Coordinate): End point, reached at t=1.
    """

    src: Coordinate
    ctrl: Coordinate
    dst: Coordinate

    @property
    def degree(self) -> int:
        """int: The polynomial degree of the curve."""
        return 2

    @property
    def control_points(self) -> Tuple[Coordinate, Coordinate, Coordinate]:
        """The control points as Tuple (src, ctrl, dst)."""
        return self.src, self.ctrl, self.dst

    def point_at(self, t: float) -> Coordinate:
        """Evaluate the curve at parameter t."""
        return BezierCurve.quadratic_point(self.src, self.ctrl, self.dst, t)

    def points_at(self, t: ParameterValues) -> NDArray[np.float64]:
        """Evaluate the curve at many parameter values, returning an array of shape (n, 2)."""
        return BezierCurve.quadratic_points(self.control_points, t)


###############################################################################
# CubicCurve
###############################################################################
@dataclass(frozen=True)
class CubicCurve:
    """
    A cubic Bezier curve defined by a start, two control and an end point.

    Attributes:
        src (Coordinate): Start point, reached at t=0.
        ctrl1 (Coordinate): First control point.
        ctrl2 (Coordinate): Second control point.
        dst (Coordinate): End point, reached at t=1.
    """

    src: Coordinate
    ctrl1: Coordinate
    ctrl2: Coordinate
    dst: Coordinate

    @property
    def degree(self) -> int:
        """int: The polynomial degree of the curve."""
        return 3

    @property
    def control_points(self) -> Tuple[Coordinate, Coordinate, Coordinate, Coordinate]:
        """The control points as Tuple (src, ctrl1, ctrl2, dst)."""
        return self.src, self.ctrl1, self.ctrl2, self.dst

    def point_at(self, t: float) -> Coordinate:
        """Evaluate the curve at parameter t."""
        return BezierCurve.cubic_point(self.src, self.ctrl1, self.ctrl2, self.dst, t)

    def points_at(self, t: ParameterValues) -> NDArray[np.float64]:
        """Evaluate the curve at many parameter values, returning an array of shape (n, 2)."""
        return BezierCurve.cubic_points(self.control_points, t)


Curve = Union[QuadraticCurve, CubicCurve]


def curve_from_points(points: Sequence) -> Curve:
    """
    Build a curve from exactly 3 (quadratic) or 4 (cubic) control points.

    Args:
        points: Control points as Coordinates or (x, y) pairs

    Returns:
        Curve: a QuadraticCurve or a CubicCurve

    Raises:
        InvalidInputError: If points is None, a point is malformed
            or the number of points is neither 3 nor 4
    """
    if points is None:
        raise InvalidInputError("Provided control point sequence is None")

    coords = [Coordinate.from_sequence(point) for point in points]
    if len(coords) == QUADRATIC_POINT_COUNT:
        return QuadraticCurve(*coords)
    if len(coords) == CUBIC_POINT_COUNT:
        return CubicCurve(*coords)
    raise InvalidInputError(
        f"A Bezier curve requires {QUADRATIC_POINT_COUNT} or {CUBIC_POINT_COUNT} control points, got {len(coords)}"
    )
