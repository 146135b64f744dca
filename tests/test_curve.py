"""Test module for bezeval.curve

The tests are run using pytest.
"""

import numpy as np
import pytest

from bezeval.curve import CubicCurve, QuadraticCurve, curve_from_points
from bezeval.errors import InvalidInputError
from bezeval.geom import Coordinate


def test_curve_from_three_points_is_quadratic():
    """Three control points build a QuadraticCurve."""
    curve = curve_from_points([(0.0, 0.0), (1.0, 2.0), (2.0, 0.0)])
    assert isinstance(curve, QuadraticCurve)
    assert curve.degree == 2
    assert curve.control_points == (Coordinate(0.0, 0.0), Coordinate(1.0, 2.0), Coordinate(2.0, 0.0))


def test_curve_from_four_points_is_cubic():
    """Four control points build a CubicCurve."""
    curve = curve_from_points([Coordinate(0, 0), Coordinate(0, 1), Coordinate(1, 1), Coordinate(1, 0)])
    assert isinstance(curve, CubicCurve)
    assert curve.degree == 3
    assert curve.ctrl2 == Coordinate(1.0, 1.0)


@pytest.mark.parametrize("count", [0, 2, 5])
def test_curve_from_points_rejects_other_counts(count):
    """Point counts other than 3 or 4 are rejected instead of truncated."""
    with pytest.raises(InvalidInputError):
        curve_from_points([(float(i), 0.0) for i in range(count)])


def test_curve_from_points_rejects_none():
    """A missing sequence raises InvalidInputError."""
    with pytest.raises(InvalidInputError):
        curve_from_points(None)


def test_point_at_and_points_at_agree():
    """Scalar and vectorized evaluation return the same points."""
    curve = CubicCurve(Coordinate(0.0, 0.0), Coordinate(0.0, 1.0), Coordinate(1.0, 1.0), Coordinate(1.0, 0.0))
    result = curve.points_at([0.0, 0.5, 1.0])
    assert np.allclose(result[1], (0.5, 0.75))
    assert np.allclose(result[1], curve.point_at(0.5).to_tuple())
    assert curve.point_at(0.0) == curve.src
    assert curve.point_at(1.0) == curve.dst


def test_quadratic_point_at_end_is_exact():
    """The quadratic curve reaches its end point exactly at t=1."""
    curve = QuadraticCurve(Coordinate(0.3, 0.1), Coordinate(7.7, 2.9), Coordinate(-1.3, 5.5))
    assert curve.point_at(1.0) == curve.dst
