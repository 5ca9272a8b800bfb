"""Numeric constants shared by the :mod:`euclid` modules.

Everything angle-related reads its defaults from here so the conversion
factor and tolerances are defined exactly once.
"""
import math

TWO_PI: float = 2.0 * math.pi

# Degrees per radian, to full double precision.
DEGREES_IN_RADIAN: float = 180.0 / math.pi

# Default tolerance for floating-point equality.
DEFAULT_EPSILON: float = 1.0e-14

# Beyond this many full turns the normalisation loop is skipped and the value
# is reduced with fmod first; subtracting 2*pi from huge floats is a no-op.
MAX_NORMALISE_TURNS: int = 1_000_000

LOGGER_NAME: str = "euclid"
