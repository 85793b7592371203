"""Numeric casts between angle payloads and float working precision.

Unit conversion happens in Python float precision whatever the payload type
is. The result is then cast back to the payload's own type, which truncates
toward zero for integer payloads and fails loudly when the value cannot be
represented (NaN or infinity into an integer, a value outside the range of a
fixed-width NumPy integer). These failures are programming errors and are
never caught by the library.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np

from ..config import BASE_TYPE


def is_real(value: Any) -> bool:
    """Return True if ``value`` can be used as an angle payload or scalar."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, BASE_TYPE)


def to_float(value: BASE_TYPE) -> float:
    """Widen a payload to float.

    Raises:
        OverflowError: If an integer payload is too large for a float.
    """
    return float(value)


def cast_like(value: float, like: BASE_TYPE) -> BASE_TYPE:
    """Cast a float result back to the numeric type of ``like``.

    Args:
        value: Float value computed in working precision.
        like: Payload whose type the result must have.

    Returns:
        ``value`` converted to ``type(like)``.

    Raises:
        OverflowError: If the value is infinite or outside the range of a
            fixed-width integer type.
        ValueError: If the value is NaN and the target is an integer type.
    """
    target = type(like)
    if isinstance(like, np.integer):
        truncated = math.trunc(value)
        info = np.iinfo(target)
        if not info.min <= truncated <= info.max:
            msg = f"{value!r} is out of range for {target.__name__}"
            raise OverflowError(msg)
        return target(truncated)
    if isinstance(like, int):
        return target(math.trunc(value))
    return target(value)
