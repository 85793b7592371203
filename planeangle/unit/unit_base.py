"""Base unit class with family bookkeeping.

This module provides the Unit class that every angle type derives from. A
unit family is identified by its ROOT class: the first class in the MRO that
sets ``IS_FAMILY_ROOT = True``. Values are only combined with values of the
same family, so an angle can be added to an angle but not to an unrelated
Unit subclass or a bare number.

Classes:
    Unit: Base class for all unit types with family management.

Example:
    >>> class Angle(Unit):
    ...     IS_FAMILY_ROOT = True  # This becomes the ROOT for angle units
    >>> class Radians(Angle):
    ...     pass  # Automatically gets ROOT = Angle
    >>> class Degrees(Angle):
    ...     pass  # Also gets ROOT = Angle
"""

from __future__ import annotations

from typing import Any, ClassVar


class Unit:
    """Base class for all unit types.

    Attributes:
        ROOT (ClassVar[type[Unit]]): Root class defining the unit family.
        SYMBOL (ClassVar[str]): Unit symbol for display purposes.
        IS_FAMILY_ROOT (ClassVar[bool]): Indicates if this class is a root unit.
    """

    __slots__ = ()
    __array_priority__ = 1000

    ROOT: ClassVar[type[Unit]]
    SYMBOL: ClassVar[str] = ""
    IS_FAMILY_ROOT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        """Attach a new unit class to its family.

        ``Angle`` declares IS_FAMILY_ROOT and becomes its own ROOT;
        ``Radians`` and ``Degrees`` pick ``Angle`` up from their MRO. A class
        with no family root above it forms a family of its own. An explicit
        ROOT in the class body is left alone.

        Args:
            **kwargs: Forwarded to super().__init_subclass__.
        """
        super().__init_subclass__(**kwargs)
        if cls.__dict__.get("ROOT") is not None:
            return

        family_roots = (klass for klass in cls.mro() if klass.__dict__.get("IS_FAMILY_ROOT", False))
        cls.ROOT = next(family_roots, cls)

    @classmethod
    def _same_root(cls, other: Any) -> bool:
        return isinstance(other, Unit) and cls.ROOT is type(other).ROOT

    @classmethod
    def _check_same_root(cls, other: Any):
        """Check that ``other`` is a value of the same unit family.

        Args:
            other: The operand to check compatibility with.

        Raises:
            TypeError: If ``other`` is not a Unit or belongs to another family.
        """
        if not cls._same_root(other):
            other_family = type(other).ROOT if isinstance(other, Unit) else type(other)
            msg = f"unsupported operand families: {cls.ROOT.__name__} and {other_family.__name__}"
            raise TypeError(msg)
