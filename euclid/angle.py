"""Planar angle value type.

:class:`Angle` keeps its value in radians no matter how it was built and
projects it into a range (unlimited, signed or unsigned) only when the value
is read or printed.  Comparisons always work on the value normalised into
``[0, 2*pi)`` so two angles a full turn apart compare equal.

The instance is mutable: the range and display unit can be changed after
construction and the ``normalize_to_*`` methods rewrite the stored value.
Changing a flag never alters the stored value.
"""
from __future__ import annotations

from enum import Enum
import logging
import math
from typing import Optional, Union

from .config import DEFAULT_EPSILON, DEGREES_IN_RADIAN, MAX_NORMALISE_TURNS, TWO_PI
from .real import is_equal, to_degrees, to_radians

logger = logging.getLogger(__name__)


class Units(Enum):
    """Unit an angle is given in or displayed in."""

    DEGREES = "degrees"
    RADIANS = "radians"


class Range(Enum):
    """Interval the stored value is projected into when read."""

    UNLIMITED = "unlimited"  # any value
    UNSIGNED = "unsigned"  # [0, 2*pi)
    SIGNED = "signed"  # (-pi, pi]


class Angle:
    """An angle held in radians with range-aware readers.

    ``Angle(x)`` takes radians, ``Angle(x, Units.DEGREES)`` converts from
    degrees and ``Angle(other)`` copies another angle including its flags.
    """

    DEGREES_IN_RADIAN = DEGREES_IN_RADIAN

    def __init__(self, angle: Union[float, "Angle"] = 0.0, units: Units = Units.RADIANS) -> None:
        self.range = Range.UNLIMITED
        self.units = Units.RADIANS
        if isinstance(angle, Angle):
            self.shallow_copy(angle)
            return
        if not isinstance(units, Units):
            raise TypeError(
                f"units must be a Units member, not {type(units).__name__}; "
                "use Angle.from_components(y, x) to build an angle from a vector"
            )
        value = float(angle)
        self.value = value if units is Units.RADIANS else to_radians(value)

    # ------------------------------------------------------------------
    # Alternative constructors
    # ------------------------------------------------------------------
    @classmethod
    def from_degrees(cls, degrees: float) -> "Angle":
        return cls(degrees, Units.DEGREES)

    @classmethod
    def from_components(cls, y: float, x: float) -> "Angle":
        """Angle of the vector ``(x, y)`` from the positive x-axis, in ``(-pi, pi]``."""
        return cls(math.atan2(y, x))

    def copy(self) -> "Angle":
        return Angle(self)

    def shallow_copy(self, other: "Angle") -> None:
        """Overwrite value, range and units with those of *other*."""
        self.value = other.value
        self.range = other.range
        self.units = other.units

    # ------------------------------------------------------------------
    # Arithmetic (results carry default flags)
    # ------------------------------------------------------------------
    def plus(self, other: Union["Angle", float]) -> "Angle":
        return Angle(self.value + self._operand(other))

    def subtract(self, other: Union["Angle", float]) -> "Angle":
        return Angle(self.value - self._operand(other))

    def multiply_by(self, factor: float) -> "Angle":
        if isinstance(factor, Angle):
            raise TypeError("an Angle can only be multiplied by a scalar")
        return Angle(self.value * float(factor))

    def __add__(self, other: Union["Angle", float]) -> "Angle":
        if self._coerce(other) is None:
            return NotImplemented  # type: ignore[return-value]
        return self.plus(other)

    __radd__ = __add__

    def __sub__(self, other: Union["Angle", float]) -> "Angle":
        if self._coerce(other) is None:
            return NotImplemented  # type: ignore[return-value]
        return self.subtract(other)

    def __mul__(self, factor: float) -> "Angle":
        if isinstance(factor, Angle) or self._coerce(factor) is None:
            return NotImplemented  # type: ignore[return-value]
        return self.multiply_by(factor)

    __rmul__ = __mul__

    def __neg__(self) -> "Angle":
        return Angle(-self.value)

    # ------------------------------------------------------------------
    # Trigonometry on the raw value
    # ------------------------------------------------------------------
    def cos(self) -> float:
        return math.cos(self.value)

    def sin(self) -> float:
        return math.sin(self.value)

    def tan(self) -> float:
        return math.tan(self.value)

    # ------------------------------------------------------------------
    # Normalisation
    # ------------------------------------------------------------------
    @staticmethod
    def normalise(angle: float) -> float:
        """Return *angle* shifted by whole turns into ``[0, 2*pi)``.

        Raises :class:`ValueError` for NaN or infinite input, which would
        otherwise never leave the loop.
        """
        if not math.isfinite(angle):
            raise ValueError(f"Cannot normalise non-finite angle {angle!r}")
        result = float(angle)
        if abs(result) > MAX_NORMALISE_TURNS * TWO_PI:
            result = math.fmod(result, TWO_PI)
        while result < 0.0:
            result += TWO_PI
        while result >= TWO_PI:
            result -= TWO_PI
        logger.debug("normalised %r to %r", angle, result)
        return result

    def normalize_to_2pi(self) -> None:
        """Rewrite the stored value into ``[0, 2*pi)``."""
        self.value = Angle.normalise(self.value)

    def normalize_to_plus_minus_pi(self) -> None:
        """Rewrite the stored value into ``(-pi, pi]``."""
        value = Angle.normalise(self.value)
        if value > math.pi:
            value -= TWO_PI
        self.value = value

    def _adjust(self, value: float) -> float:
        if self.range is Range.UNLIMITED:
            return value
        temp = Angle.normalise(value)
        if self.range is Range.UNSIGNED:
            return temp
        if temp > math.pi:
            temp -= TWO_PI
        elif temp < -math.pi:
            temp += TWO_PI
        return temp

    # ------------------------------------------------------------------
    # Readers / writers
    # ------------------------------------------------------------------
    def get_radian(self) -> float:
        return self._adjust(self.value)

    get_angle = get_radian

    def get_degrees(self) -> float:
        return to_degrees(self._adjust(self.value))

    def put_degrees(self, degrees: float) -> None:
        """Store *degrees* as the raw value, ignoring the range."""
        self.value = to_radians(float(degrees))

    @property
    def radians(self) -> float:
        return self.get_radian()

    @property
    def degrees(self) -> float:
        """The adjusted angle in degrees."""
        return self.get_degrees()

    @degrees.setter
    def degrees(self, value: float) -> None:
        self.put_degrees(value)

    def get_range(self) -> Range:
        return self.range

    def set_range(self, range: Range) -> None:
        """Change the read range; the stored value is left untouched."""
        self.range = range

    def get_units(self) -> Units:
        return self.units

    def set_units(self, units: Units) -> None:
        """Change the unit used by :meth:`to_string`."""
        self.units = units

    def __float__(self) -> float:
        return self.get_radian()

    # ------------------------------------------------------------------
    # Right angles
    # ------------------------------------------------------------------
    def get_right_angle(self, eps: Optional["Angle"]) -> Optional[int]:
        """Test whether this is a right angle within tolerance *eps*.

        Returns ``1`` for ``pi/2``, ``-1`` for ``-pi/2``, ``0`` otherwise and
        ``None`` if no tolerance is given.  The receiver is not modified.
        """
        if eps is None:
            return None
        abs_eps = abs(eps.get_radian())
        signed = Angle(self.value)
        signed.normalize_to_plus_minus_pi()
        if abs(math.pi / 2.0 - signed.value) < abs_eps:
            return 1
        if abs(-math.pi / 2.0 - signed.value) < abs_eps:
            return -1
        return 0

    # ------------------------------------------------------------------
    # Comparisons on values normalised into [0, 2*pi)
    # ------------------------------------------------------------------
    def _coerce(self, other) -> float | None:
        """Return the raw radian value of *other*, ``None`` if unsupported."""
        if isinstance(other, Angle):
            return other.value
        if isinstance(other, (str, bytes)):
            return None
        try:
            return float(other)
        except (TypeError, ValueError):
            return None

    def _operand(self, other) -> float:
        value = self._coerce(other)
        if value is None:
            raise TypeError(f"Cannot use {type(other).__name__} as an angle")
        return value

    def _normalised_pair(self, other) -> tuple[float, float]:
        return Angle.normalise(self.value), Angle.normalise(self._operand(other))

    def is_equal_to(self, other: Union["Angle", float, None], epsilon: float = DEFAULT_EPSILON) -> bool:
        """Equality of the normalised values within *epsilon*."""
        if other is None:
            return False
        mine, theirs = self._normalised_pair(other)
        return is_equal(mine, theirs, epsilon)

    def is_exactly_equal_to(self, other: Union["Angle", float]) -> bool:
        """Exact float equality of the normalised values, no tolerance."""
        mine, theirs = self._normalised_pair(other)
        return mine == theirs

    def greater_than(self, other: Union["Angle", float]) -> bool:
        mine, theirs = self._normalised_pair(other)
        return mine > theirs

    def greater_than_or_equals(self, other: Union["Angle", float]) -> bool:
        mine, theirs = self._normalised_pair(other)
        return mine >= theirs

    def less_than(self, other: Union["Angle", float]) -> bool:
        mine, theirs = self._normalised_pair(other)
        return mine < theirs

    def less_than_or_equals(self, other: Union["Angle", float]) -> bool:
        mine, theirs = self._normalised_pair(other)
        return mine <= theirs

    def __eq__(self, other: object) -> bool:
        if self._coerce(other) is None:
            return NotImplemented  # type: ignore[return-value]
        return self.is_exactly_equal_to(other)  # type: ignore[arg-type]

    def __lt__(self, other: Union["Angle", float]) -> bool:
        if self._coerce(other) is None:
            return NotImplemented  # type: ignore[return-value]
        return self.less_than(other)

    def __le__(self, other: Union["Angle", float]) -> bool:
        if self._coerce(other) is None:
            return NotImplemented  # type: ignore[return-value]
        return self.less_than_or_equals(other)

    def __gt__(self, other: Union["Angle", float]) -> bool:
        if self._coerce(other) is None:
            return NotImplemented  # type: ignore[return-value]
        return self.greater_than(other)

    def __ge__(self, other: Union["Angle", float]) -> bool:
        if self._coerce(other) is None:
            return NotImplemented  # type: ignore[return-value]
        return self.greater_than_or_equals(other)

    # mutable, so not hashable
    __hash__ = None  # type: ignore[assignment]

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------
    def to_string(self) -> str:
        temp = self._adjust(self.value)
        if self.units is Units.DEGREES:
            return f"{to_degrees(temp)} degrees"
        return str(temp)

    __str__ = to_string

    def __repr__(self) -> str:
        return f"Angle({self.value!r}, range={self.range.name}, units={self.units.name})"
