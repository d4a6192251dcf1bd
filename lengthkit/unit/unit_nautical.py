"""Nautical length units.

Classes:
    NauticalUnit: Fathom, cable and nautical mile.

The nautical mile is exactly 1852 m, the cable a tenth of it and the
fathom six feet.
"""

from __future__ import annotations

from .unit_base import LengthUnit, UnitSystem


class NauticalUnit(LengthUnit):
    """Nautical unit family (factors in meters)."""

    FATHOM = (1.8288, ("ftm",), ("fathom", "fathoms"))
    CABLE = (185.2, ("cb",), ("cable", "cables"))
    NAUTICAL_MILE = (1852.0, ("nmi", "NM"), ("nautical mile", "nautical miles"))

    @property
    def system(self) -> UnitSystem:
        return UnitSystem.NAUTICAL
