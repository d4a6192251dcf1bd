"""Length quantity type with unit-aware conversion and arithmetic.

This module provides the Length class, which pairs a finite float magnitude
with a length unit. Lengths convert to any registered unit, add and subtract
across units (the right operand is converted to the unit of the left one),
scale by plain numbers and normalize to the most natural unit of their own
family.

Every operation comes in two forms:

- a functional form (``to``, ``add``, ``normalize``, ...) returning a new
  Length and leaving the receiver untouched
- an in-place form (``to_by_ref``, ``add_by_ref``, ``normalize_by_ref``,
  ...) updating the receiver and returning it, for chaining

Both forms compute the same numbers. Failed operations raise before
anything is modified.

A Length produced by the parser remembers the exact string it was read
from (see to_original_string()). Any transformation forgets it.

Classes:
    Length: A magnitude tagged with a length unit.

Example:
    >>> from lengthkit import Length, MetricUnit
    >>>
    >>> distance = Length.from_string("5km")
    >>> distance.add(Length(2000, MetricUnit.METER))
    Length(7.0, MetricUnit.KILOMETER)
    >>> distance.to(MetricUnit.METER).value
    5000.0
    >>> Length(5000, MetricUnit.METER).normalize().to_string()
    '5km'
    >>>
    >>> trip = Length(1, MetricUnit.KILOMETER)
    >>> trip.add_by_ref(Length(500, MetricUnit.METER)).multiply_by_ref(2)
    Length(3.0, MetricUnit.KILOMETER)
"""

from __future__ import annotations

from math import isclose, isfinite
from typing import Self

from lengthkit.config import NORMALIZE_TOLERANCE
from lengthkit.errors import DivisionByZero, NonFiniteValue, Overflow
from lengthkit.formatting import format_length
from lengthkit.log import get_logger
from lengthkit.unit import REGISTRY, LengthUnit, MetricUnit

Number = int | float

LOG = get_logger("length")


def _finite(value: float, operation: str) -> float:
    if not isfinite(value):
        raise Overflow(operation, value)
    return value


class Length:
    """A finite magnitude tagged with a length unit.

    The magnitude may be negative (a signed displacement). The unit can only
    change through ``to``/``to_by_ref``, which rescale the magnitude with it.

    Args:
        value: Magnitude in ``unit``. Anything ``float()`` accepts.
        unit: Unit of the magnitude. Defaults to the meter.

    Raises:
        NonFiniteValue: If ``value`` is NaN or infinite.
        TypeError: If ``unit`` is not a length unit.

    Example:
        >>> Length()
        Length(0.0, MetricUnit.METER)
        >>> Length(2.5, MetricUnit.KILOMETER).to_string()
        '2.5km'
    """

    __slots__ = ("_value", "_unit", "_original")

    def __init__(self, value: Number = 0.0, unit: LengthUnit = MetricUnit.METER):
        value = float(value)
        if not isfinite(value):
            raise NonFiniteValue(value)
        if not isinstance(unit, LengthUnit):
            raise TypeError(f"Expected a length unit, got {type(unit).__name__}")
        self._value = value
        self._unit = unit
        self._original: str | None = None

    @classmethod
    def from_string(cls, text: str) -> Length:
        """Parse a length such as ``"5m"``, ``"3.2 km"`` or ``"1 mile"``.

        See lengthkit.parser.parse() for the accepted grammar.

        Raises:
            InvalidNumber: If the string does not start with a number.
            UnrecognizedUnit: If the rest of the string is not a unit.
        """
        from lengthkit.parser import parse

        return parse(text)

    @classmethod
    def _parsed(cls, value: float, unit: LengthUnit, text: str) -> Length:
        length = cls(value, unit)
        length._original = text
        return length

    # -------------------------------- Accessors --------------------------------
    @property
    def value(self) -> float:
        """Magnitude in ``unit``."""
        return self._value

    @property
    def unit(self) -> LengthUnit:
        return self._unit

    def to_original_string(self) -> str | None:
        """Return the exact string this length was parsed from.

        Returns:
            str | None: The parser input, or None if the length was built
            directly or results from any conversion or arithmetic.
        """
        return self._original

    def meters(self) -> float:
        """Magnitude expressed in meters."""
        return self._value * self._unit.factor

    # -------------------------------- Conversion --------------------------------
    def _value_in(self, unit: LengthUnit) -> float:
        if not isinstance(unit, LengthUnit):
            raise TypeError(f"Expected a length unit, got {type(unit).__name__}")
        return _finite(REGISTRY.convert(self._value, self._unit, unit), "conversion")

    def to(self, unit: LengthUnit) -> Length:
        """Convert to another unit.

        Args:
            unit: Target unit, from any family.

        Returns:
            Length: New length in ``unit``, without an original string.

        Raises:
            Overflow: If the converted magnitude is not finite.
            TypeError: If ``unit`` is not a length unit.
        """
        return Length(self._value_in(unit), unit)

    def to_by_ref(self, unit: LengthUnit) -> Self:
        """Convert this length to another unit in place.

        Converting to the unit already in use leaves the length untouched.

        Returns:
            Length: This length.
        """
        value = self._value_in(unit)
        if unit is not self._unit:
            self._set(value, unit)
        return self

    def _set(self, value: float, unit: LengthUnit | None = None) -> None:
        self._value = value
        if unit is not None:
            self._unit = unit
        self._original = None

    # -------------------------------- Arithmetic --------------------------------
    def _sum(self, other: Length, sign: float, operation: str) -> float:
        if not isinstance(other, Length):
            raise TypeError(f"Cannot {operation} {type(other).__name__} and Length")
        return _finite(self._value + sign * other._value_in(self._unit), operation)

    def add(self, other: Length) -> Length:
        """Add another length, converted to this length's unit.

        Args:
            other: Length in any unit.

        Returns:
            Length: The sum, in this length's unit.

        Raises:
            Overflow: If the sum is not finite.
            TypeError: If ``other`` is not a Length.
        """
        return Length(self._sum(other, 1.0, "addition"), self._unit)

    def add_by_ref(self, other: Length) -> Self:
        """Add another length in place and return this length."""
        self._set(self._sum(other, 1.0, "addition"))
        return self

    def subtract(self, other: Length) -> Length:
        """Subtract another length, converted to this length's unit.

        The result may be negative.

        Raises:
            Overflow: If the difference is not finite.
            TypeError: If ``other`` is not a Length.
        """
        return Length(self._sum(other, -1.0, "subtraction"), self._unit)

    def subtract_by_ref(self, other: Length) -> Self:
        """Subtract another length in place and return this length."""
        self._set(self._sum(other, -1.0, "subtraction"))
        return self

    def _product(self, factor: Number) -> float:
        return _finite(self._value * float(factor), "multiplication")

    def multiply_by(self, factor: Number) -> Length:
        """Scale by a number; the unit is kept.

        Args:
            factor: Anything ``float()`` accepts. Zero gives a zero length.

        Raises:
            Overflow: If the product is not finite.
        """
        return Length(self._product(factor), self._unit)

    def multiply_by_ref(self, factor: Number) -> Self:
        """Scale in place by a number and return this length."""
        self._set(self._product(factor))
        return self

    def _quotient(self, factor: Number) -> float:
        divisor = float(factor)
        if divisor == 0.0:
            raise DivisionByZero()
        return _finite(self._value / divisor, "division")

    def divide_by(self, factor: Number) -> Length:
        """Divide by a number; the unit is kept.

        Args:
            factor: Anything ``float()`` accepts.

        Raises:
            DivisionByZero: If ``factor`` is zero.
            Overflow: If the quotient is not finite.
        """
        return Length(self._quotient(factor), self._unit)

    def divide_by_ref(self, factor: Number) -> Self:
        """Divide in place by a number and return this length."""
        self._set(self._quotient(factor))
        return self

    # -------------------------------- Normalization --------------------------------
    def natural_unit(self) -> LengthUnit:
        """Pick the most readable unit of this length's family.

        That is the largest unit in which the magnitude is at least 1, the
        smallest unit of the family if the magnitude is below all of them,
        and the largest one if it exceeds all of them. Zero keeps its unit.
        A magnitude on a boundary moves to the larger unit (10 m is 1 dam,
        12 in is 1 ft); magnitudes short of a boundary by no more than
        NORMALIZE_TOLERANCE (relative) count as on it.

        Returns:
            LengthUnit: The chosen unit.
        """
        current = self._unit
        if self._value == 0.0:
            return current

        meters = abs(self.meters())
        family = REGISTRY.units(current.system)
        chosen = family[0]
        for candidate in family:
            if meters >= candidate.factor * (1.0 - NORMALIZE_TOLERANCE):
                chosen = candidate
        return chosen

    def normalize(self) -> Length:
        """Re-express this length in its natural unit (see natural_unit()).

        Returns:
            Length: New length in the natural unit. Its magnitude equals this
            length's magnitude when the unit does not change.
        """
        unit = self.natural_unit()
        if unit is self._unit:
            return Length(self._value, unit)
        LOG.debug("Normalizing %r %s to %s", self._value, self._unit.symbol, unit.symbol)
        return self.to(unit)

    def normalize_by_ref(self) -> Self:
        """Normalize in place and return this length."""
        return self.to_by_ref(self.natural_unit())

    # -------------------------------- Comparison --------------------------------
    def is_close(self, other: Length, rel_tol: float = 1e-9, abs_tol: float = 0.0) -> bool:
        """Compare magnitudes in meters with a tolerance.

        Args:
            other: Length in any unit.
            rel_tol: Relative tolerance, as for math.isclose().
            abs_tol: Absolute tolerance in meters.
        """
        if not isinstance(other, Length):
            raise TypeError(f"Cannot compare Length and {type(other).__name__}")
        return isclose(self.meters(), other.meters(), rel_tol=rel_tol, abs_tol=abs_tol)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Length):
            return NotImplemented
        return self.meters() == other.meters()

    def __lt__(self, other: Length) -> bool:
        if not isinstance(other, Length):
            return NotImplemented
        return self.meters() < other.meters()

    def __le__(self, other: Length) -> bool:
        if not isinstance(other, Length):
            return NotImplemented
        return self.meters() <= other.meters()

    def __gt__(self, other: Length) -> bool:
        if not isinstance(other, Length):
            return NotImplemented
        return self.meters() > other.meters()

    def __ge__(self, other: Length) -> bool:
        if not isinstance(other, Length):
            return NotImplemented
        return self.meters() >= other.meters()

    # Mutable through the *_by_ref methods
    __hash__ = None

    # -------------------------------- Operators --------------------------------
    def __add__(self, other: Length) -> Length:
        if not isinstance(other, Length):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Length) -> Length:
        if not isinstance(other, Length):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, factor: Number) -> Length:
        if not isinstance(factor, Number):
            return NotImplemented
        return self.multiply_by(factor)

    def __rmul__(self, factor: Number) -> Length:
        return self.__mul__(factor)

    def __truediv__(self, factor: Number) -> Length:
        if not isinstance(factor, Number):
            return NotImplemented
        return self.divide_by(factor)

    def __iadd__(self, other: Length) -> Self:
        if not isinstance(other, Length):
            return NotImplemented
        return self.add_by_ref(other)

    def __isub__(self, other: Length) -> Self:
        if not isinstance(other, Length):
            return NotImplemented
        return self.subtract_by_ref(other)

    def __imul__(self, factor: Number) -> Self:
        if not isinstance(factor, Number):
            return NotImplemented
        return self.multiply_by_ref(factor)

    def __itruediv__(self, factor: Number) -> Self:
        if not isinstance(factor, Number):
            return NotImplemented
        return self.divide_by_ref(factor)

    def __neg__(self) -> Length:
        return Length(-self._value, self._unit)

    def __abs__(self) -> Length:
        return Length(abs(self._value), self._unit)

    def __float__(self) -> float:
        return self.meters()

    # -------------------------------- Formatting --------------------------------
    def to_string(self) -> str:
        """Render as number and unit symbol without whitespace, e.g. ``"5m"``."""
        return format_length(self._value, self._unit)

    def format(self, unit: LengthUnit | None = None, precision: int | None = None) -> str:
        """Render in an optional other unit with an optional precision.

        Args:
            unit: Unit to render in. None keeps the current unit.
            precision: Maximum digits after the decimal point.

        Returns:
            str: The rendered length, e.g. ``"3.11mi"``.
        """
        if unit is None:
            return format_length(self._value, self._unit, precision)
        return format_length(self._value_in(unit), unit, precision)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Length({self._value!r}, {type(self._unit).__name__}.{self._unit.name})"
