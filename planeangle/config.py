"""Global configuration and type definitions for planeangle.

This module keeps the numeric type aliases and the constants shared by the
angle types and the free trigonometric functions.

Type Definitions:
    BASE_TYPE: Union of the payload types an angle accepts and the scalars
               it can be scaled by. Python native numbers, exact
               ``Fraction`` and ``Decimal`` values, and NumPy integer and
               floating scalars (``numpy.int32``, ``numpy.float32``, ...).
               Booleans are ints to Python but are rejected as payloads.

Constants:
    TWO_PI: One full turn in radians.
    DEGREES_PER_TURN: One full turn in degrees.
    DEFAULT_TOLERANCE: Absolute tolerance used by ``Angle.is_close``.

Example:
    >>> from planeangle.config import BASE_TYPE
    >>> import numpy as np
    >>> scalar_int: BASE_TYPE = 42
    >>> scalar_float: BASE_TYPE = 3.14159
    >>> scalar_np: BASE_TYPE = np.float32(1.5)
"""

from decimal import Decimal
from fractions import Fraction
from math import pi

from numpy import floating, integer

BASE_TYPE = int | float | Fraction | Decimal | integer | floating

TWO_PI = 2.0 * pi
DEGREES_PER_TURN = 360.0

DEFAULT_TOLERANCE = 1e-10
