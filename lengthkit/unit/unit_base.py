"""Base unit model for length quantities.

This module provides the foundation shared by every length unit family.
Each family (metric, imperial, nautical, astronomical, typographical) is a
closed enumeration deriving from LengthUnit, so the full set of units is
fixed at import time and can be matched exhaustively.

Every unit carries:
- factor: how many meters one unit is worth (always > 0)
- symbols: case-sensitive symbols, the first one used for display
- names: case-insensitive spelled-out names (singular and plural forms)
- system: the UnitSystem the unit belongs to

Units of different families convert freely through their meter factors;
the family only matters for normalization, which stays inside the family
of the unit already in use.

Classes:
    UnitSystem: Enumeration of the unit families.
    LengthUnit: Member-less enum base class providing the unit metadata.

Example:
    >>> class CubitUnit(LengthUnit):
    ...     CUBIT = (0.4572, ("cbt",), ("cubit", "cubits"))
    ...
    ...     @property
    ...     def system(self) -> UnitSystem:
    ...         return UnitSystem.IMPERIAL
    >>> CubitUnit.CUBIT.factor
    0.4572
    >>> str(CubitUnit.CUBIT)
    'cbt'
"""

from __future__ import annotations

from enum import Enum
from fractions import Fraction


class UnitSystem(Enum):
    """Families of length units."""

    METRIC = "metric"
    IMPERIAL = "imperial"
    NAUTICAL = "nautical"
    ASTRONOMICAL = "astronomical"
    TYPOGRAPHICAL = "typographical"


class LengthUnit(Enum):
    """Base class for all length unit families.

    Concrete families subclass this enum and declare their members as
    ``(factor, symbols, names)`` tuples. Subclasses must override the
    ``system`` property to name their family.

    Attributes:
        factor (float): Meters per one unit.
        symbols (tuple[str, ...]): Case-sensitive symbols, canonical first.
        names (tuple[str, ...]): Case-insensitive names.
    """

    def __init__(self, factor: float, symbols: tuple[str, ...], names: tuple[str, ...] = ()):
        if not symbols:
            raise ValueError(f"Unit {self.name} needs at least one symbol")
        self._factor = float(factor)
        self._symbols = tuple(symbols)
        self._names = tuple(names)

    @property
    def factor(self) -> float:
        """Meters per one unit."""
        return self._factor

    @property
    def symbol(self) -> str:
        """Canonical symbol used when rendering lengths."""
        return self._symbols[0]

    @property
    def symbols(self) -> tuple[str, ...]:
        return self._symbols

    @property
    def names(self) -> tuple[str, ...]:
        return self._names

    @property
    def system(self) -> UnitSystem:
        """Family the unit belongs to."""
        raise NotImplementedError

    def __str__(self) -> str:
        return self.symbol


def si_factor(exponent: int) -> float:
    """Return ``10 ** exponent`` as the correctly rounded float.

    The power is evaluated exactly with rational arithmetic and rounded once,
    so ``si_factor(-3)`` is the same float as the literal ``0.001``.

    Args:
        exponent: Power of ten.

    Returns:
        float: Nearest float to ``10 ** exponent``.
    """
    return float(Fraction(10) ** exponent)
