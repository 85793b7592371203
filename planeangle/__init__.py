"""Planar angles with unit-aware arithmetic and trigonometry.

planeangle provides a small value type for a planar angle that remembers the
unit it was given in. Angles convert between radians and degrees on demand,
normalize into a single turn, measure the shortest distance to one another
and support the usual arithmetic and trigonometry.

Components:
    Angle: Family root of the angle values
    Radians: Angle measured in radians
    Degrees: Angle measured in degrees
    asin, acos, atan, atan2: Inverse trigonometry returning Radians
    mean_angle: Circular mean of a collection of angles

Typical Usage:
    >>> from planeangle import Degrees, Radians, mean_angle
    >>>
    >>> heading = Degrees(350.0)
    >>> turn = Degrees(20.0)
    >>> print((heading + turn).normalized())  # "10.0°"
    >>>
    >>> Degrees(0.1).min_dist(Degrees(359.9)).in_degrees()  # ~0.2
    >>> mean_angle([Degrees(20.0), Degrees(350.0)]).in_degrees()  # ~5.0
"""

import logging

from .trig import acos, asin, atan, atan2, mean_angle
from .unit import Angle, Degrees, Radians, Unit

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "Unit",
    "Angle",
    "Radians",
    "Degrees",
    "asin",
    "acos",
    "atan",
    "atan2",
    "mean_angle",
]
