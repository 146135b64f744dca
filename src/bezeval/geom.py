"""Handling 2D coordinates"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from bezeval.errors import InvalidInputError


###############################################################################
# Coordinate
###############################################################################
@dataclass(frozen=True)
class Coordinate:
    """
    Represents an immutable point in 2D space.

    Attributes:
        x (float): The x-coordinate.
        y (float): The y-coordinate.
    """

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def get_x(self) -> float:
        """float: The x-coordinate."""
        return self.x

    def get_y(self) -> float:
        """float: The y-coordinate."""
        return self.y

    def to_tuple(self) -> Tuple[float, float]:
        """The coordinate as Tuple (x, y)."""
        return self.x, self.y

    def is_finite(self) -> bool:
        """True if both components are finite numbers."""
        return math.isfinite(self.x) and math.isfinite(self.y)

    @classmethod
    def from_sequence(cls, point: Union[Coordinate, Sequence[float], NDArray[np.float64]]) -> Coordinate:
        """
        Create a Coordinate from a Coordinate or an (x, y) pair.

        Additional trailing values (e.g. a type column of a 3D point row) are ignored.

        Args:
            point: A Coordinate, a tuple/list (x, y) or a NumPy row

        Returns:
            Coordinate: the converted point

        Raises:
            InvalidInputError: If the point has fewer than two numeric components
        """
        if isinstance(point, Coordinate):
            return point
        try:
            x, y = point[0], point[1]
            return cls(float(x), float(y))
        except (TypeError, ValueError, IndexError, KeyError) as exc:
            raise InvalidInputError(f"Cannot interpret {point!r} as a 2D coordinate") from exc

    def __str__(self):
        """Returns a string representation of the Coordinate instance."""
        return f"Coordinate(x={self.x}, y={self.y})"
