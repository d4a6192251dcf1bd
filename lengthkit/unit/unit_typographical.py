"""Typographical length units based on the inch.

Classes:
    TypographicalUnit: Twip, point and pica (DTP definitions).

Example:
    >>> round(TypographicalUnit.POINT.factor * 72, 10)
    0.0254
"""

from __future__ import annotations

from .unit_base import LengthUnit, UnitSystem

_INCH = 0.0254


class TypographicalUnit(LengthUnit):
    """Typographical unit family (factors in meters)."""

    TWIP = (_INCH / 1440, ("twp",), ("twip", "twips"))
    POINT = (_INCH / 72, ("pt",), ("point", "points"))
    PICA = (_INCH / 6, ("pica",), ("pica", "picas"))

    @property
    def system(self) -> UnitSystem:
        return UnitSystem.TYPOGRAPHICAL
