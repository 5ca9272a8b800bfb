"""Planar angle value type with explicit units and range handling.

The package exposes :class:`Angle` together with the :class:`Units` and
:class:`Range` flags it is parameterised by.
"""

from .angle import Angle, Range, Units
from .config import DEGREES_IN_RADIAN, TWO_PI
from .logging_config import setup_logging

__all__ = [
    "Angle",
    "Range",
    "Units",
    "DEGREES_IN_RADIAN",
    "TWO_PI",
    "setup_logging",
]
