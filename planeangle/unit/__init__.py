"""Angle unit family.

Modules:
    - unit_base: Unit base class with family management
    - numeric: Checked casts between payload types and float precision
    - unit_angle: The Angle family root and its Radians and Degrees variants

Example:
    >>> from planeangle.unit import Degrees, Radians
    >>> Degrees(180.0) == Radians(3.141592653589793)  # True
    >>> Degrees(90) + Degrees(45)  # Degrees(135)
"""

from .unit_angle import Angle, Degrees, Radians
from .unit_base import Unit

__all__ = [
    "Unit",
    "Angle",
    "Radians",
    "Degrees",
]
