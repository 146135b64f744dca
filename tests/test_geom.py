"""Test module for bezeval.geom

The tests are run using pytest.
"""

import dataclasses

import numpy as np
import pytest

from bezeval.errors import InvalidInputError
from bezeval.geom import Coordinate

###############################################################################
# Coordinate Construction Tests
###############################################################################


class TestCoordinateConstruction:
    """Test construction and accessors of Coordinate."""

    def test_default_is_origin(self):
        """Default construction yields (0, 0)."""
        point = Coordinate()
        assert point.get_x() == 0.0
        assert point.get_y() == 0.0

    def test_accessors(self):
        """Accessors return the constructor values."""
        point = Coordinate(1.5, -2.25)
        assert point.x == 1.5
        assert point.y == -2.25
        assert point.get_x() == 1.5
        assert point.get_y() == -2.25
        assert point.to_tuple() == (1.5, -2.25)

    def test_components_are_floats(self):
        """Integer and NumPy inputs are stored as Python floats."""
        point = Coordinate(1, np.float64(2.0))
        assert isinstance(point.x, float)
        assert isinstance(point.y, float)

    def test_immutable(self):
        """Coordinates cannot be modified after construction."""
        point = Coordinate(1.0, 2.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            point.x = 3.0  # type: ignore[misc]

    def test_value_equality_and_hash(self):
        """Coordinates compare and hash by value."""
        assert Coordinate(1.0, 2.0) == Coordinate(1.0, 2.0)
        assert Coordinate(1.0, 2.0) != Coordinate(2.0, 1.0)
        assert len({Coordinate(1.0, 2.0), Coordinate(1, 2)}) == 1

    def test_is_finite(self):
        """Non-finite components are detected."""
        assert Coordinate(1.0, 2.0).is_finite()
        assert not Coordinate(float("nan"), 0.0).is_finite()
        assert not Coordinate(0.0, float("inf")).is_finite()


###############################################################################
# Coordinate Conversion Tests
###############################################################################


class TestCoordinateConversion:
    """Test conversions from and to other representations."""

    def test_from_sequence_tuple(self):
        """An (x, y) tuple converts to a Coordinate."""
        assert Coordinate.from_sequence((3.0, 4.0)) == Coordinate(3.0, 4.0)

    def test_from_sequence_numpy_row_ignores_extra_columns(self):
        """A NumPy row with a type column keeps only x and y."""
        row = np.array([3.0, 4.0, 2.0], dtype=np.float64)
        assert Coordinate.from_sequence(row) == Coordinate(3.0, 4.0)

    def test_from_sequence_returns_same_coordinate(self):
        """A Coordinate is passed through unchanged."""
        point = Coordinate(1.0, 1.0)
        assert Coordinate.from_sequence(point) is point

    @pytest.mark.parametrize("bad_point", [None, 5.0, (1.0,), ("a", "b"), "xy"])
    def test_from_sequence_rejects_malformed(self, bad_point):
        """Values without two numeric components raise InvalidInputError."""
        with pytest.raises(InvalidInputError):
            Coordinate.from_sequence(bad_point)

    def test_str(self):
        """String representation contains both components."""
        assert str(Coordinate(1.0, 2.0)) == "Coordinate(x=1.0, y=2.0)"
