"""Unit registry: token lookup, factors and conversion.

The registry indexes every unit of every family by its symbols and names and
answers the questions the parser and the Length type ask about units:

- which unit a token stands for (exact or longest-prefix match)
- how many meters a unit is worth, and how it is displayed
- which units are its smaller and greater neighbours within its family
- what a value in one unit is in another unit

Symbols are matched case-sensitively ("Mm" is a megameter, "mm" a
millimeter); names are matched case-insensitively ("Kilometers" works).
Longest-prefix matching tries longer tokens first, so "mi" is read as
mile and never as meter followed by "i".

The process-wide REGISTRY is built once at import time from the family
enums and is never modified afterwards, so it can be read from any thread.

Classes:
    UnitRegistry: Index over a fixed collection of length units.

Constants:
    REGISTRY: The registry of all built-in units.

Example:
    >>> REGISTRY.lookup("km")
    <MetricUnit.KILOMETER: 'kilo'>
    >>> REGISTRY.longest_match("mi")
    (<ImperialUnit.MILE: ...>, 2)
    >>> REGISTRY.convert(5.0, MetricUnit.METER, MetricUnit.CENTIMETER)
    500.0
"""

from __future__ import annotations

from collections.abc import Iterable
from itertools import chain
from operator import attrgetter

import numpy as np

from lengthkit.config import BASE_TYPE
from lengthkit.errors import UnrecognizedUnit
from lengthkit.log import get_logger

from .unit_astronomical import AstronomicalUnit
from .unit_base import LengthUnit, UnitSystem
from .unit_imperial import ImperialUnit
from .unit_metric import MetricUnit
from .unit_nautical import NauticalUnit
from .unit_typographical import TypographicalUnit

LOG = get_logger("registry")


class UnitRegistry:
    """Index over a fixed collection of length units.

    Args:
        units: Units to register. Every token (symbol or name) must identify
            exactly one unit, and every factor must be positive.

    Raises:
        ValueError: On a duplicate token, a symbol that collides with another
            unit's name after case folding, or a non-positive factor.
    """

    def __init__(self, units: Iterable[LengthUnit]):
        self._units: tuple[LengthUnit, ...] = tuple(units)
        self._symbols: dict[str, LengthUnit] = {}
        self._names: dict[str, LengthUnit] = {}

        for unit in self._units:
            if not unit.factor > 0:
                raise ValueError(f"Unit {unit.name} must have a positive factor, got {unit.factor}")
            for symbol in unit.symbols:
                self._add(self._symbols, symbol, unit)
            for name in unit.names:
                self._add(self._names, name.lower(), unit)

        for symbol, unit in self._symbols.items():
            owner = self._names.get(symbol.lower())
            if owner is not None and owner is not unit:
                raise ValueError(f"Symbol {symbol!r} of {unit.name} collides with a name of {owner.name}")

        families: dict[UnitSystem, list[LengthUnit]] = {}
        for unit in self._units:
            families.setdefault(unit.system, []).append(unit)
        self._families: dict[UnitSystem, tuple[LengthUnit, ...]] = {
            system: tuple(sorted(members, key=attrgetter("factor"))) for system, members in families.items()
        }
        self._positions: dict[LengthUnit, int] = {
            unit: index for members in self._families.values() for index, unit in enumerate(members)
        }

        # (token, case_sensitive, unit), longest token first
        tokens = [(symbol, True, unit) for symbol, unit in self._symbols.items()]
        tokens += [(name, False, unit) for name, unit in self._names.items()]
        self._tokens = sorted(tokens, key=lambda entry: len(entry[0]), reverse=True)

        LOG.debug(
            "Registered %d units in %d families (%d symbols, %d names)",
            len(self._units),
            len(self._families),
            len(self._symbols),
            len(self._names),
        )

    @staticmethod
    def _add(index: dict[str, LengthUnit], key: str, unit: LengthUnit) -> None:
        existing = index.get(key)
        if existing is not None and existing is not unit:
            raise ValueError(f"Duplicate unit key: {key}")
        index[key] = unit

    # -------------------------------- Lookup --------------------------------
    def lookup(self, token: str) -> LengthUnit:
        """Return the unit a complete token stands for.

        Args:
            token: A unit symbol (case-sensitive) or name (case-insensitive).

        Returns:
            LengthUnit: The matching unit.

        Raises:
            UnrecognizedUnit: If no unit has this symbol or name.
        """
        unit = self._symbols.get(token)
        if unit is None:
            unit = self._names.get(token.lower())
        if unit is None:
            raise UnrecognizedUnit(token)
        return unit

    def longest_match(self, text: str) -> tuple[LengthUnit, int]:
        """Find the longest registered token at the start of ``text``.

        Args:
            text: Text that should start with a unit token.

        Returns:
            tuple[LengthUnit, int]: The matching unit and the number of
            characters of ``text`` its token covers.

        Raises:
            UnrecognizedUnit: If no token matches the start of ``text``.
        """
        for token, case_sensitive, unit in self._tokens:
            head = text[: len(token)]
            if len(head) != len(token):
                continue
            if not case_sensitive:
                head = head.lower()
            if head == token:
                return unit, len(token)
        raise UnrecognizedUnit(text)

    # -------------------------------- Unit data --------------------------------
    def factor(self, unit: LengthUnit) -> float:
        """Return the number of meters in one ``unit``."""
        return self._check(unit).factor

    def symbol(self, unit: LengthUnit) -> str:
        """Return the canonical display symbol of ``unit``."""
        return self._check(unit).symbol

    def units(self, system: UnitSystem | None = None) -> tuple[LengthUnit, ...]:
        """List registered units, smallest first.

        Args:
            system: Restrict the listing to one family. None lists every
                family in UnitSystem order.

        Returns:
            tuple[LengthUnit, ...]: Units ordered by factor within each family.
        """
        if system is not None:
            return self._families.get(system, ())
        return tuple(chain.from_iterable(self._families.get(member, ()) for member in UnitSystem))

    def smaller_unit(self, unit: LengthUnit) -> LengthUnit | None:
        """Return the next smaller unit of the same family, if any."""
        index = self._positions[self._check(unit)]
        if index == 0:
            return None
        return self._families[unit.system][index - 1]

    def greater_unit(self, unit: LengthUnit) -> LengthUnit | None:
        """Return the next greater unit of the same family, if any."""
        members = self._families[self._check(unit).system]
        index = self._positions[unit]
        if index == len(members) - 1:
            return None
        return members[index + 1]

    # -------------------------------- Conversion --------------------------------
    def convert(self, value: BASE_TYPE, from_unit: LengthUnit, to_unit: LengthUnit) -> BASE_TYPE:
        """Convert a value between two units.

        The result is ``value * factor(from_unit) / factor(to_unit)``. When
        the intermediate product in meters is not finite, the value is scaled
        by the factor ratio instead, so huge magnitudes convert between
        large units. NumPy arrays are converted element-wise. Converting to
        the same unit returns ``value`` untouched.

        Args:
            value: Magnitude (or array of magnitudes) in ``from_unit``.
            from_unit: Unit the value is expressed in.
            to_unit: Unit to express the value in.

        Returns:
            BASE_TYPE: Magnitude(s) in ``to_unit``.
        """
        self._check(from_unit)
        self._check(to_unit)
        if from_unit is to_unit:
            return value
        result = value * from_unit.factor / to_unit.factor
        if not np.all(np.isfinite(result)):
            result = value * (from_unit.factor / to_unit.factor)
        return result

    def _check(self, unit: LengthUnit) -> LengthUnit:
        if not isinstance(unit, LengthUnit):
            raise TypeError(f"Expected a length unit, got {type(unit).__name__}")
        if unit not in self._positions:
            raise UnrecognizedUnit(unit.symbol)
        return unit

    def __contains__(self, unit: object) -> bool:
        return unit in self._positions

    def __iter__(self):
        return iter(self.units())

    def __len__(self) -> int:
        return len(self._units)


REGISTRY = UnitRegistry(chain(MetricUnit, ImperialUnit, NauticalUnit, AstronomicalUnit, TypographicalUnit))
