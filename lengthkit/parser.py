"""Parsing of human-written length strings.

Grammar (whitespace is optional everywhere it is shown):

    length  := number unit
    number  := [+-] (digits [. [digits]] | . digits) [(e|E) [+-] digits]
    unit    := any registered unit symbol or name

The input is split into its longest leading number and the remainder. The
number is read as a float; the remainder, with surrounding whitespace
removed, must be exactly one unit token. Symbols are case-sensitive, names
are not, and longer tokens win over shorter ones, so ``"1mi"`` is a mile and
``"1 Mm"`` a megameter.

Accepted:   "5m", "5 m", " -3.2e3 km ", ".5in", "2 light-years", "10 NM"
Rejected:   "abc", "m", "" (no number), "5" (no unit), "5 m x" (trailing text)

Functions:
    parse: Read a string into a Length that remembers the string.
    split_length: Read a string into its (value, unit) parts.
"""

from __future__ import annotations

import re
from math import isinf

from lengthkit.errors import InvalidNumber, UnrecognizedUnit
from lengthkit.length import Length
from lengthkit.log import get_logger
from lengthkit.unit import REGISTRY, LengthUnit

LOG = get_logger("parser")

_NUMBER = re.compile(r"\s*[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def split_length(text: str) -> tuple[float, LengthUnit]:
    """Split a length string into its magnitude and unit.

    Args:
        text: String such as ``"3.2 km"``.

    Returns:
        tuple[float, LengthUnit]: The magnitude and the unit.

    Raises:
        InvalidNumber: If the string does not start with a number, or the
            number is too large to be represented.
        UnrecognizedUnit: If the remainder is empty or is not exactly one
            registered unit token.
        TypeError: If ``text`` is not a string.
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected a string, got {type(text).__name__}")

    match = _NUMBER.match(text)
    if match is None:
        raise InvalidNumber(text)

    value = float(match.group())
    if isinf(value):
        raise InvalidNumber(text, "number out of range")

    remainder = text[match.end() :].strip()
    if not remainder:
        raise UnrecognizedUnit("", text)
    try:
        unit, consumed = REGISTRY.longest_match(remainder)
    except UnrecognizedUnit:
        raise UnrecognizedUnit(remainder, text) from None
    if consumed != len(remainder):
        raise UnrecognizedUnit(remainder, text)
    return value, unit


def parse(text: str) -> Length:
    """Parse a length string.

    Args:
        text: String such as ``"5m"``, ``"3.2 km"`` or ``"1 mile"``.

    Returns:
        Length: The parsed length; ``to_original_string()`` returns ``text``.

    Raises:
        InvalidNumber: If the string does not start with a usable number.
        UnrecognizedUnit: If the rest of the string is not a unit.

    Example:
        >>> parse("1mi").to(MetricUnit.METER).value
        1609.344
        >>> parse("5 km").to_original_string()
        '5 km'
    """
    value, unit = split_length(text)
    LOG.debug("Parsed %r as %r %s", text, value, unit.symbol)
    return Length._parsed(value, unit, text)
