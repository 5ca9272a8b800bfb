"""Small floating-point helpers used by :class:`~euclid.angle.Angle`."""
from __future__ import annotations

from .config import DEFAULT_EPSILON, DEGREES_IN_RADIAN


def is_equal(a: float, b: float, epsilon: float = DEFAULT_EPSILON) -> bool:
    """Return ``True`` if *a* and *b* differ by less than *epsilon*."""
    return abs(a - b) < epsilon


def to_radians(degrees: float) -> float:
    """Convert degrees to radians."""
    return degrees / DEGREES_IN_RADIAN


def to_degrees(radians: float) -> float:
    """Convert radians to degrees."""
    return radians * DEGREES_IN_RADIAN
