"""Imperial length units based on the international yard.

Since 1959 the yard is defined as exactly 0.9144 meters, which makes every
imperial unit an exact decimal number of meters. The factors below are
written as those decimals so that, for example, one mile converts to
1609.344 m without accumulated rounding.

Classes:
    ImperialUnit: Thou, inch, foot, yard, chain, furlong, mile and league.

Example:
    >>> ImperialUnit.MILE.factor
    1609.344
    >>> ImperialUnit.FOOT.names
    ('foot', 'feet')
"""

from __future__ import annotations

from .unit_base import LengthUnit, UnitSystem


class ImperialUnit(LengthUnit):
    """Imperial unit family (factors in meters)."""

    THOU = (0.0000254, ("th", "mil"), ("thou", "thous"))
    INCH = (0.0254, ("in",), ("inch", "inches"))
    FOOT = (0.3048, ("ft",), ("foot", "feet"))
    YARD = (0.9144, ("yd",), ("yard", "yards"))
    CHAIN = (20.1168, ("ch",), ("chain", "chains"))
    FURLONG = (201.168, ("fur",), ("furlong", "furlongs"))
    MILE = (1609.344, ("mi",), ("mile", "miles"))
    LEAGUE = (4828.032, ("lea",), ("league", "leagues"))

    @property
    def system(self) -> UnitSystem:
        return UnitSystem.IMPERIAL
