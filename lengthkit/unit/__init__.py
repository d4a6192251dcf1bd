"""Length unit system: unit families, registry and conversion factors.

This package defines the closed set of length units understood by lengthkit.
Units are grouped into families, each family an enumeration, and every unit
knows how many meters it is worth. All conversions go through the meter, so
any unit converts to any other unit regardless of family.

Architecture:
    The unit system is organized into specialized modules:

    - unit_base: LengthUnit enum base and the UnitSystem enumeration
    - unit_metric: Meter with all SI prefixes, generated from the prefix table
    - unit_imperial: Thou, inch, foot, yard, chain, furlong, mile, league
    - unit_nautical: Fathom, cable, nautical mile
    - unit_astronomical: Light-second to gigaparsec, astronomical unit
    - unit_typographical: Twip, point, pica
    - registry: Token lookup, factors, family ordering and conversion

Unit Families:
    - Metric: quectometer (1e-30 m) ... meter ... quettameter (1e30 m)
    - Imperial: international yard based, exact decimal factors
    - Nautical: nautical mile of 1852 m and its divisions
    - Astronomical: light-travel distances, au and parsecs
    - Typographical: DTP point and its relatives

Example:
    >>> from lengthkit.unit import REGISTRY, ImperialUnit, MetricUnit, UnitSystem
    >>>
    >>> REGISTRY.lookup("mi") is ImperialUnit.MILE
    True
    >>> REGISTRY.convert(1.0, ImperialUnit.MILE, MetricUnit.METER)
    1609.344
    >>> [unit.symbol for unit in REGISTRY.units(UnitSystem.NAUTICAL)]
    ['ftm', 'cb', 'nmi']
"""

from .registry import REGISTRY, UnitRegistry
from .unit_astronomical import AstronomicalUnit
from .unit_base import LengthUnit, UnitSystem
from .unit_imperial import ImperialUnit
from .unit_metric import SI_PREFIXES, MetricUnit, SIPrefix
from .unit_nautical import NauticalUnit
from .unit_typographical import TypographicalUnit

Unit = MetricUnit | ImperialUnit | NauticalUnit | AstronomicalUnit | TypographicalUnit  # Any length unit

__all__ = [
    # Base classes
    "LengthUnit",
    "UnitSystem",
    "Unit",
    # Families
    "MetricUnit",
    "ImperialUnit",
    "NauticalUnit",
    "AstronomicalUnit",
    "TypographicalUnit",
    # SI prefixes
    "SIPrefix",
    "SI_PREFIXES",
    # Registry
    "UnitRegistry",
    "REGISTRY",
]
