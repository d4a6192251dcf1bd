"""Length quantities with unit-aware parsing, conversion and arithmetic.

lengthkit represents physical lengths as a magnitude tagged with a unit,
reads them from human-written strings, converts them between unit systems
and combines lengths of different units without manual conversion.

Framework Components:
    Unit System (lengthkit.unit):
        • Closed unit families: metric (quecto- to quetta-meter), imperial,
          nautical, astronomical and typographical
        • Registry with case-aware symbol and name lookup
        • Meter based conversion factors for every unit

    Parser (lengthkit.parser):
        • "5m", "3.2 km", "-1e3 ft", "2 light-years"
        • Longest-match unit lookup ("mi" is a mile, not a meter)

    Length (lengthkit.length):
        • Conversion to any unit
        • Addition and subtraction across units, scaling by numbers
        • Normalization to the most natural unit of the family
        • Functional and in-place (``*_by_ref``) forms of every operation

    Formatting (lengthkit.formatting):
        • Compact rendering ("1.5km") with optional unit and precision

Usage Patterns:
    >>> from lengthkit import Length, MetricUnit, ImperialUnit, parse
    >>>
    >>> mile = parse("1mi")
    >>> mile.to(MetricUnit.METER).value
    1609.344
    >>> Length(1, MetricUnit.KILOMETER).add(Length(500, MetricUnit.METER))
    Length(1.5, MetricUnit.KILOMETER)
    >>> parse("5000m").normalize().to_string()
    '5km'
    >>> parse("1 mi").format(MetricUnit.KILOMETER, precision=2)
    '1.61km'

Errors:
    All errors derive from lengthkit.LengthError: InvalidNumber and
    UnrecognizedUnit for parsing, DivisionByZero and Overflow for
    arithmetic, NonFiniteValue for NaN or infinite magnitudes.
"""

from lengthkit.errors import (
    DivisionByZero,
    InvalidNumber,
    LengthArithmeticError,
    LengthError,
    NonFiniteValue,
    Overflow,
    ParseError,
    UnrecognizedUnit,
)
from lengthkit.formatting import format_length, format_value
from lengthkit.length import Length
from lengthkit.log import enable_console_logging
from lengthkit.parser import parse, split_length
from lengthkit.unit import (
    REGISTRY,
    AstronomicalUnit,
    ImperialUnit,
    LengthUnit,
    MetricUnit,
    NauticalUnit,
    TypographicalUnit,
    Unit,
    UnitRegistry,
    UnitSystem,
)

__version__ = "0.1.0"

__all__ = [
    # Quantity
    "Length",
    "parse",
    "split_length",
    # Units
    "LengthUnit",
    "Unit",
    "UnitSystem",
    "MetricUnit",
    "ImperialUnit",
    "NauticalUnit",
    "AstronomicalUnit",
    "TypographicalUnit",
    "UnitRegistry",
    "REGISTRY",
    # Formatting
    "format_value",
    "format_length",
    # Errors
    "LengthError",
    "ParseError",
    "InvalidNumber",
    "UnrecognizedUnit",
    "LengthArithmeticError",
    "DivisionByZero",
    "Overflow",
    "NonFiniteValue",
    # Logging
    "enable_console_logging",
]
