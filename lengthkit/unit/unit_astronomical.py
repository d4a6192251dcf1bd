"""Astronomical length units.

This module provides the distance units used at solar-system and galactic
scales. Light-based units use the defined speed of light and the Julian
year of 365.25 days; the astronomical unit uses its 2012 IAU definition and
the parsec is derived from it as ``648000 / pi`` astronomical units.

Classes:
    AstronomicalUnit: Light-second through gigaparsec.

Constants:
    SPEED_OF_LIGHT: Meters per second.
    JULIAN_YEAR: Seconds per Julian year.
    AU_IN_METERS: Meters per astronomical unit.
    PARSEC_IN_METERS: Meters per parsec.

Example:
    >>> AstronomicalUnit.LIGHTYEAR.factor
    9460730472580800.0
    >>> AstronomicalUnit.PARSEC.symbol
    'pc'
"""

from __future__ import annotations

from math import pi

from .unit_base import LengthUnit, UnitSystem

SPEED_OF_LIGHT = 299_792_458.0
JULIAN_YEAR = 365.25 * 86_400.0
AU_IN_METERS = 149_597_870_700.0
PARSEC_IN_METERS = AU_IN_METERS * 648_000.0 / pi


class AstronomicalUnit(LengthUnit):
    """Astronomical unit family (factors in meters).

    The symbol ``pc`` always means parsec; the typographic pica is written
    out as ``pica``.
    """

    LIGHTSECOND = (
        SPEED_OF_LIGHT,
        ("ls",),
        ("light-second", "light-seconds", "lightsecond", "lightseconds"),
    )
    LIGHTMINUTE = (
        SPEED_OF_LIGHT * 60.0,
        ("lm",),
        ("light-minute", "light-minutes", "lightminute", "lightminutes"),
    )
    ASTRONOMICAL_UNIT = (
        AU_IN_METERS,
        ("au", "AU", "ua"),
        ("astronomical unit", "astronomical units"),
    )
    LIGHTHOUR = (
        SPEED_OF_LIGHT * 3_600.0,
        ("lh",),
        ("light-hour", "light-hours", "lighthour", "lighthours"),
    )
    LIGHTDAY = (
        SPEED_OF_LIGHT * 86_400.0,
        ("ld",),
        ("light-day", "light-days", "lightday", "lightdays"),
    )
    LIGHTYEAR = (
        SPEED_OF_LIGHT * JULIAN_YEAR,
        ("ly",),
        ("light-year", "light-years", "lightyear", "lightyears"),
    )
    PARSEC = (PARSEC_IN_METERS, ("pc",), ("parsec", "parsecs"))
    KILOPARSEC = (PARSEC_IN_METERS * 1e3, ("kpc",), ("kiloparsec", "kiloparsecs"))
    MEGAPARSEC = (PARSEC_IN_METERS * 1e6, ("Mpc",), ("megaparsec", "megaparsecs"))
    GIGAPARSEC = (PARSEC_IN_METERS * 1e9, ("Gpc",), ("gigaparsec", "gigaparsecs"))

    @property
    def system(self) -> UnitSystem:
        return UnitSystem.ASTRONOMICAL
