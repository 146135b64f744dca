"""Exceptions raised by Bezier curve evaluation."""

from __future__ import annotations


class BezierError(Exception):
    """Base exception for Bezier curve evaluation errors."""


class InvalidConfigurationError(BezierError, ValueError):
    """Raised when an evaluator is configured with a smoothness outside (0, 1)."""


class InvalidInputError(BezierError, ValueError):
    """Raised when control points are missing or cannot be interpreted."""
