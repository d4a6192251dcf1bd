"""Metric length units: the meter with every SI prefix.

This module provides the metric family, from the quectometer (1e-30 m) to
the quettameter (1e30 m). The family is generated from the SI prefix table
rather than hand-listing factors: each member names its prefix, and the
factor, symbols and spelled-out names are all derived from the table entry.

Metric symbols are case-sensitive, so ``mm`` (millimeter) and ``Mm``
(megameter) as well as ``pm`` (picometer) and ``Pm`` (petameter) are
different units. Spelled-out names accept both ``meter`` and ``metre``
spellings in any case.

Classes:
    SIPrefix: One row of the SI prefix table.
    MetricUnit: The metric unit family.

Constants:
    SI_PREFIXES: The SI prefix table, smallest to largest.

Example:
    >>> MetricUnit.KILOMETER.factor
    1000.0
    >>> MetricUnit.MICROMETER.symbols
    ('µm', 'μm', 'um')
    >>> MetricUnit.METER.factor
    1.0
"""

from __future__ import annotations

from typing import NamedTuple

from .unit_base import LengthUnit, UnitSystem, si_factor


class SIPrefix(NamedTuple):
    """SI prefix entry.

    Attributes:
        name (str): Prefix as spelled in unit names ("kilo").
        symbols (tuple[str, ...]): Prefix symbols, canonical first ("k",).
        exponent (int): Power of ten the prefix stands for.
        aliases (tuple[str, ...]): Alternate spellings of the prefix name.
    """

    name: str
    symbols: tuple[str, ...]
    exponent: int
    aliases: tuple[str, ...] = ()


SI_PREFIXES: tuple[SIPrefix, ...] = (
    SIPrefix("quecto", ("q",), -30),
    SIPrefix("ronto", ("r",), -27),
    SIPrefix("yocto", ("y",), -24),
    SIPrefix("zepto", ("z",), -21),
    SIPrefix("atto", ("a",), -18),
    SIPrefix("femto", ("f",), -15),
    SIPrefix("pico", ("p",), -12),
    SIPrefix("nano", ("n",), -9),
    SIPrefix("micro", ("µ", "μ", "u"), -6),
    SIPrefix("milli", ("m",), -3),
    SIPrefix("centi", ("c",), -2),
    SIPrefix("deci", ("d",), -1),
    SIPrefix("", ("",), 0),
    SIPrefix("deca", ("da",), 1, aliases=("deka",)),
    SIPrefix("hecto", ("h",), 2),
    SIPrefix("kilo", ("k",), 3),
    SIPrefix("mega", ("M",), 6),
    SIPrefix("giga", ("G",), 9),
    SIPrefix("tera", ("T",), 12),
    SIPrefix("peta", ("P",), 15),
    SIPrefix("exa", ("E",), 18),
    SIPrefix("zetta", ("Z",), 21),
    SIPrefix("yotta", ("Y",), 24),
    SIPrefix("ronna", ("R",), 27),
    SIPrefix("quetta", ("Q",), 30),
)

_PREFIX_BY_NAME = {prefix.name: prefix for prefix in SI_PREFIXES}

# Names that are not built from a prefix and "meter".
_EXTRA_NAMES = {
    "micro": ("micron", "microns"),
}


def _metric_names(prefix: SIPrefix) -> tuple[str, ...]:
    names = []
    for spelling in (prefix.name, *prefix.aliases):
        for stem in ("meter", "metre"):
            names.append(f"{spelling}{stem}")
            names.append(f"{spelling}{stem}s")
    names.extend(_EXTRA_NAMES.get(prefix.name, ()))
    return tuple(names)


class MetricUnit(LengthUnit):
    """Metric unit family.

    Each member's value is the name of its SI prefix; the factor is
    ``10 ** exponent`` meters for the prefix's exponent, rounded once to
    the nearest float.

    Example:
        >>> MetricUnit.CENTIMETER.symbol
        'cm'
        >>> MetricUnit.CENTIMETER.factor
        0.01
    """

    QUECTOMETER = "quecto"
    RONTOMETER = "ronto"
    YOCTOMETER = "yocto"
    ZEPTOMETER = "zepto"
    ATTOMETER = "atto"
    FEMTOMETER = "femto"
    PICOMETER = "pico"
    NANOMETER = "nano"
    MICROMETER = "micro"
    MILLIMETER = "milli"
    CENTIMETER = "centi"
    DECIMETER = "deci"
    METER = ""
    DECAMETER = "deca"
    HECTOMETER = "hecto"
    KILOMETER = "kilo"
    MEGAMETER = "mega"
    GIGAMETER = "giga"
    TERAMETER = "tera"
    PETAMETER = "peta"
    EXAMETER = "exa"
    ZETTAMETER = "zetta"
    YOTTAMETER = "yotta"
    RONNAMETER = "ronna"
    QUETTAMETER = "quetta"

    def __init__(self, prefix_name: str):
        prefix = _PREFIX_BY_NAME[prefix_name]
        super().__init__(
            si_factor(prefix.exponent),
            tuple(f"{symbol}m" for symbol in prefix.symbols),
            _metric_names(prefix),
        )
        self._exponent = prefix.exponent

    @property
    def exponent(self) -> int:
        """Power of ten of the unit relative to the meter."""
        return self._exponent

    @property
    def system(self) -> UnitSystem:
        return UnitSystem.METRIC
