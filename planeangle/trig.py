"""Inverse trigonometric functions and the circular mean.

Every function here returns a Radians angle with a float payload. The inverse
sine and cosine are only defined on ``[-1, 1]``; outside of it they return
None instead of raising.

Functions:
    asin: Arcsine, in ``[-π/2, π/2]`` rad.
    acos: Arccosine, in ``[0, π]`` rad.
    atan: Arctangent, in ``[-π/2, π/2]`` rad.
    atan2: Four quadrant arctangent of ``y`` and ``x``.
    mean_angle: Circular mean of a collection of angles.

Example:
    >>> from planeangle import Degrees, asin, mean_angle
    >>> mean_angle([Degrees(350.0), Degrees(10.0)]).in_degrees()  # ~0.0
    >>> asin(2.0) is None  # True
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

from .unit import Angle, Radians

logger = logging.getLogger(__name__)


def _nan_on_domain_error(func, value: float) -> float:
    # math raises instead of returning NaN outside the domain
    try:
        return func(value)
    except ValueError:
        return math.nan


def asin(value: float) -> Radians | None:
    """Compute the arcsine of a number.

    Args:
        value: Sine of the angle.

    Returns:
        Radians | None: Angle in ``[-π/2, π/2]`` rad, or None if ``value`` is
        outside ``[-1, 1]``.
    """
    result = _nan_on_domain_error(math.asin, value)
    if math.isnan(result):
        logger.debug("asin(%r) is outside the domain [-1, 1]", value)
        return None
    return Radians(result)


def acos(value: float) -> Radians | None:
    """Compute the arccosine of a number.

    Args:
        value: Cosine of the angle.

    Returns:
        Radians | None: Angle in ``[0, π]`` rad, or None if ``value`` is
        outside ``[-1, 1]``.
    """
    result = _nan_on_domain_error(math.acos, value)
    if math.isnan(result):
        logger.debug("acos(%r) is outside the domain [-1, 1]", value)
        return None
    return Radians(result)


def atan(value: float) -> Radians:
    """Compute the arctangent of a number, in ``[-π/2, π/2]`` rad."""
    return Radians(math.atan(value))


def atan2(y: float, x: float) -> Radians:
    """Compute the four quadrant arctangent of ``y`` and ``x``."""
    return Radians(math.atan2(y, x))


def mean_angle(angles: Iterable[Angle]) -> Radians:
    """Compute the circular mean of a collection of angles.

    The angles are placed on the unit circle and their Cartesian coordinates
    are averaged, so 350° and 10° average to 0° rather than 180°.

    Args:
        angles: Iterable of angles in any unit. It is consumed once.

    Returns:
        Radians: Normalized mean angle in ``[0, 2π)``.

    Raises:
        ValueError: If ``angles`` is empty.
    """
    x = 0.0
    y = 0.0
    n = 0

    for angle in angles:
        sin, cos = angle.sin_cos()
        x += cos
        y += sin
        n += 1

    if n == 0:
        raise ValueError("mean_angle() arg is an empty iterable")

    logger.debug("mean of %d angles", n)
    return atan2(y / n, x / n).normalized()
