"""Angle value type tagged with its unit.

This module provides the Angle family: an angle is either a Radians or a
Degrees value. Unlike a unit that stores everything in SI, the payload is kept
exactly as given, in the unit of its tag, and is only converted when an
operation needs it. Keeping degree payloads untouched makes degree arithmetic
exact: adding two Degrees values never goes through π.

Classes:
    Angle: Family root with conversion, normalization, trigonometry,
        arithmetic and comparison.
    Radians: Angle whose payload is a radian measure.
    Degrees: Angle whose payload is a degree measure.

Arithmetic rules:
    - ``Degrees op Degrees`` stays in degrees for ``+``, ``-`` and comparisons.
    - Every other pairing (including ``Radians op Radians``) converts both
      sides to radians and produces Radians.
    - Scaling by a number keeps the tag and only touches the payload.

Example:
    >>> heading = Degrees(350)
    >>> print(heading + Degrees(20))  # "370°"
    >>> print((heading + Degrees(20)).normalized())  # "10°"
    >>> print(Degrees(90.0) + Radians(0.0))  # "1.5707963267948966rad"
    >>> Degrees(0.1).min_dist(Degrees(359.9)).in_degrees()  # ~0.2
"""

from __future__ import annotations

import math
import operator
from typing import Callable, ClassVar

from ..config import BASE_TYPE, DEFAULT_TOLERANCE, DEGREES_PER_TURN, TWO_PI
from .numeric import cast_like, is_real, to_float
from .unit_base import Unit


class Angle(Unit):
    """A planar angle, in radians or degrees.

    Angle itself is never instantiated; construct Radians or Degrees. Values
    are immutable, so compound assignment (``+=``, ``*=``, ...) rebinds the
    name to a new angle.

    Angles define ``__eq__`` without a hash, like the other unit values, and
    are therefore not hashable.

    Attributes:
        IS_FAMILY_ROOT (bool): True, Radians and Degrees share this root.
        PERIOD (ClassVar[float]): One full turn in the unit of the tag.
    """

    __slots__ = ("_value",)

    IS_FAMILY_ROOT = True
    PERIOD: ClassVar[float]

    def __init__(self, value: BASE_TYPE):
        """Wrap a raw number in the unit of this class.

        Args:
            value: Real number (int, float, Fraction, Decimal or NumPy scalar).

        Raises:
            TypeError: If called on Angle directly or with a non-real value.
        """
        if type(self) is Angle:
            raise TypeError("Angle cannot be instantiated; use Radians or Degrees")
        if not is_real(value):
            msg = f"angle value must be a real number, not {type(value).__name__}"
            raise TypeError(msg)
        self._value = value

    @property
    def value(self) -> BASE_TYPE:
        """Raw payload in the unit of the tag."""
        return self._value

    # -------------------------------- Constructors --------------------------------
    @classmethod
    def zero(cls) -> Radians:
        """The zero angle, 0 rad."""
        return Radians(0.0)

    @classmethod
    def eighth(cls) -> Degrees:
        """An eighth of a turn, 45°."""
        return Degrees(45.0)

    @classmethod
    def quarter(cls) -> Degrees:
        """A quarter turn, 90°."""
        return Degrees(90.0)

    @classmethod
    def half(cls) -> Degrees:
        """Half a turn, 180°."""
        return Degrees(180.0)

    @classmethod
    def full(cls) -> Degrees:
        """A full turn, 360°."""
        return Degrees(360.0)

    def is_zero(self) -> bool:
        """Check whether the payload is zero, in either unit."""
        return bool(self._value == 0)

    # -------------------------------- Conversion --------------------------------
    def in_radians(self) -> BASE_TYPE:
        """Yield the value in radians, with the payload's numeric type."""
        raise NotImplementedError

    def in_degrees(self) -> BASE_TYPE:
        """Yield the value in degrees, with the payload's numeric type."""
        raise NotImplementedError

    def as_unit(self, unit_type: type[Angle]) -> Angle:
        """Convert to another angle unit while keeping the angle type.

        Args:
            unit_type: Radians or Degrees.

        Returns:
            Angle: New instance of ``unit_type`` holding the converted value.

        Raises:
            TypeError: If ``unit_type`` is not a concrete angle unit.
        """
        if unit_type is Radians:
            return Radians(self.in_radians())
        if unit_type is Degrees:
            return Degrees(self.in_degrees())
        msg = f"cannot convert an angle to {unit_type!r}"
        raise TypeError(msg)

    def __float__(self) -> float:
        return to_float(self.in_radians())

    # -------------------------------- Normalization --------------------------------
    def normalized(self) -> Angle:
        """Map the value into one turn starting at zero.

        The result lies in ``[0, 2π)`` for Radians and ``[0, 360)`` for
        Degrees and keeps the unit tag. Exact multiples of a turn map to 0.
        For integer payloads the radian period is truncated to 6, the same
        way every other value is cast to the payload type.

        Returns:
            Angle: Normalized angle of the same unit.
        """
        v = self._value
        upper = cast_like(self.PERIOD, v)

        if 0 <= v < upper:
            return self

        v = v % upper
        if v < 0:
            v = v + upper
        # A float remainder of a tiny negative value can round up to a full turn.
        if v >= upper:
            v = v - upper
        return type(self)(v)

    # -------------------------------- Sign --------------------------------
    def abs(self) -> Angle:
        """Return the angle with the absolute value of its payload."""
        return type(self)(abs(self._value))

    def __abs__(self) -> Angle:
        return self.abs()

    def __neg__(self) -> Angle:
        return type(self)(-self._value)

    # -------------------------------- Trigonometry --------------------------------
    def sin(self) -> float:
        """Compute the sine of the angle."""
        return math.sin(self.in_radians())

    def cos(self) -> float:
        """Compute the cosine of the angle."""
        return math.cos(self.in_radians())

    def tan(self) -> float:
        """Compute the tangent of the angle."""
        return math.tan(self.in_radians())

    def sin_cos(self) -> tuple[float, float]:
        """Compute the sine and the cosine with a single radian conversion.

        Returns:
            tuple[float, float]: ``(sin(x), cos(x))``.
        """
        rad = to_float(self.in_radians())
        return math.sin(rad), math.cos(rad)

    # -------------------------------- Distance --------------------------------
    def min_dist(self, other: Angle) -> Radians:
        """Shortest unsigned angular separation to another angle.

        Args:
            other: Angle in any unit.

        Returns:
            Radians: Float separation in ``[0, π]``.

        Raises:
            TypeError: If ``other`` is not an angle.
        """
        self._check_same_root(other)
        a = to_float(self.in_radians())
        b = to_float(other.in_radians())
        d = abs(a - b)

        if 0.0 <= a < TWO_PI and 0.0 <= b < TWO_PI:
            return Radians(min(d, TWO_PI - d))
        return Radians(math.pi - abs(d % TWO_PI - math.pi))

    def is_close(self, other: Angle, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """Check whether two angles have the same radian measure within ``tolerance``.

        Raises:
            TypeError: If ``other`` is not an angle.
        """
        self._check_same_root(other)
        return abs(to_float(self.in_radians()) - to_float(other.in_radians())) < tolerance

    # -------------------------------- Arithmetic Operations --------------------------------
    def _additive(self, other: Angle, op: Callable[[BASE_TYPE, BASE_TYPE], BASE_TYPE]) -> Angle:
        self._check_same_root(other)
        if isinstance(self, Degrees) and isinstance(other, Degrees):
            return Degrees(op(self._value, other._value))
        return Radians(op(self.in_radians(), other.in_radians()))

    def _scaled(self, k: BASE_TYPE, op: Callable[[BASE_TYPE, BASE_TYPE], BASE_TYPE]) -> Angle:
        if not is_real(k):
            msg = f"angle can only be scaled by a real number, not {type(k).__name__}"
            raise TypeError(msg)
        return type(self)(op(self._value, k))

    def __add__(self, other: Angle) -> Angle:
        """Add two angles.

        Two Degrees stay in degrees; any other pairing is added in radians.

        Raises:
            TypeError: If ``other`` is not an angle.
        """
        return self._additive(other, operator.add)

    def __sub__(self, other: Angle) -> Angle:
        """Subtract two angles, with the same unit rule as addition."""
        return self._additive(other, operator.sub)

    def __iadd__(self, other: Angle) -> Angle:
        return self._additive(other, operator.add)

    def __isub__(self, other: Angle) -> Angle:
        return self._additive(other, operator.sub)

    def __mul__(self, k: BASE_TYPE) -> Angle:
        """Scale the payload by a real number, keeping the unit.

        The scalar does not have to match the payload type; the payload type
        of the result follows Python's numeric promotion, so
        ``Degrees(1) * 0.5`` is ``Degrees(0.5)``.

        Raises:
            TypeError: If ``k`` is not a real number.
        """
        return self._scaled(k, operator.mul)

    def __rmul__(self, k: BASE_TYPE) -> Angle:
        return self._scaled(k, lambda v, s: s * v)

    def __truediv__(self, k: BASE_TYPE) -> Angle:
        """Divide the payload by a real number, keeping the unit."""
        return self._scaled(k, operator.truediv)

    def __rtruediv__(self, k: BASE_TYPE) -> Angle:
        """Divide a real number by the payload, keeping the unit."""
        return self._scaled(k, lambda v, s: s / v)

    def __imul__(self, k: BASE_TYPE) -> Angle:
        return self._scaled(k, operator.mul)

    def __itruediv__(self, k: BASE_TYPE) -> Angle:
        return self._scaled(k, operator.truediv)

    # -------------------------------- Comparison --------------------------------
    def _compare(self, other: Angle, op: Callable[[BASE_TYPE, BASE_TYPE], bool]) -> bool:
        if isinstance(self, Degrees) and isinstance(other, Degrees):
            return bool(op(self._value, other._value))
        return bool(op(self.in_radians(), other.in_radians()))

    def __eq__(self, other: object) -> bool:
        """Compare two angles.

        Two Degrees compare their raw payloads; any other pairing compares
        radian values. Non-angles are never equal to an angle.
        """
        if not self._same_root(other):
            return NotImplemented
        return self._compare(other, operator.eq)

    __hash__ = None

    def __lt__(self, other: Angle) -> bool:
        self._check_same_root(other)
        return self._compare(other, operator.lt)

    def __le__(self, other: Angle) -> bool:
        self._check_same_root(other)
        return self._compare(other, operator.le)

    def __gt__(self, other: Angle) -> bool:
        self._check_same_root(other)
        return self._compare(other, operator.gt)

    def __ge__(self, other: Angle) -> bool:
        self._check_same_root(other)
        return self._compare(other, operator.ge)

    # -------------------------------- Display --------------------------------
    def __str__(self) -> str:
        return f"{self._value}{type(self).SYMBOL}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


class Radians(Angle):
    """Angle measured in radians.

    Example:
        >>> angle = Radians(1.5)
        >>> print(angle)  # "1.5rad"
        >>> angle.in_degrees()  # ~85.9437
    """

    __slots__ = ()

    PERIOD = TWO_PI
    SYMBOL = "rad"

    def in_radians(self) -> BASE_TYPE:
        return self._value

    def in_degrees(self) -> BASE_TYPE:
        return cast_like(to_float(self._value) / math.pi * 180.0, self._value)


class Degrees(Angle):
    """Angle measured in degrees, 360 to a full turn.

    Example:
        >>> bearing = Degrees(90)
        >>> print(bearing)  # "90°"
        >>> Degrees(90.0).in_radians()  # 1.5707963267948966
    """

    __slots__ = ()

    PERIOD = DEGREES_PER_TURN
    SYMBOL = "°"

    def in_radians(self) -> BASE_TYPE:
        return cast_like(to_float(self._value) / 180.0 * math.pi, self._value)

    def in_degrees(self) -> BASE_TYPE:
        return self._value
