"""
Tests for the Length quantity type.
"""

import math
import unittest

from lengthkit import Length, parse
from lengthkit.errors import DivisionByZero, LengthError, NonFiniteValue, Overflow
from lengthkit.unit import REGISTRY, AstronomicalUnit, ImperialUnit, MetricUnit, NauticalUnit


class TestConstruction(unittest.TestCase):
    """Test building lengths directly."""

    def test_default(self):
        """Test that the default length is zero meters."""
        length = Length()
        self.assertEqual(length.value, 0.0)
        self.assertIs(length.unit, MetricUnit.METER)
        self.assertIsNone(length.to_original_string())

    def test_value_coerced_to_float(self):
        """Test that integer magnitudes are stored as floats."""
        length = Length(3, ImperialUnit.FOOT)
        self.assertIsInstance(length.value, float)
        self.assertEqual(length.value, 3.0)

    def test_non_finite_rejected(self):
        """Test that NaN and infinities are refused."""
        for value in (math.nan, math.inf, -math.inf):
            with self.subTest(value=value):
                with self.assertRaises(NonFiniteValue):
                    Length(value, MetricUnit.METER)

    def test_bad_unit(self):
        """Test that the unit must be a length unit."""
        with self.assertRaises(TypeError):
            Length(1.0, "m")

    def test_read_only(self):
        """Test that value and unit cannot be assigned."""
        length = Length(1.0)
        with self.assertRaises(AttributeError):
            length.value = 2.0
        with self.assertRaises(AttributeError):
            length.unit = MetricUnit.KILOMETER

    def test_meters(self):
        """Test the magnitude in meters."""
        self.assertEqual(Length(1.5, MetricUnit.KILOMETER).meters(), 1500.0)
        self.assertEqual(float(Length(2, ImperialUnit.MILE)), 3218.688)

    def test_repr(self):
        """Test the debug representation."""
        self.assertEqual(repr(Length(1.5, MetricUnit.KILOMETER)), "Length(1.5, MetricUnit.KILOMETER)")


class TestConversion(unittest.TestCase):
    """Test unit conversion."""

    def test_to(self):
        """Test functional conversion."""
        length = parse("5 m")
        converted = length.to(MetricUnit.CENTIMETER)
        self.assertEqual(converted.value, 500.0)
        self.assertIs(converted.unit, MetricUnit.CENTIMETER)
        self.assertIsNone(converted.to_original_string())
        # receiver untouched
        self.assertEqual(length.value, 5.0)
        self.assertIs(length.unit, MetricUnit.METER)
        self.assertEqual(length.to_original_string(), "5 m")

    def test_cross_family(self):
        """Test conversion between families."""
        self.assertEqual(Length(1, ImperialUnit.MILE).to(MetricUnit.METER).value, 1609.344)
        self.assertEqual(Length(1, NauticalUnit.NAUTICAL_MILE).to(MetricUnit.KILOMETER).value, 1.852)
        light_year = Length(1, AstronomicalUnit.LIGHTYEAR).to(MetricUnit.METER)
        self.assertEqual(light_year.value, AstronomicalUnit.LIGHTYEAR.factor)

    def test_to_by_ref(self):
        """Test in-place conversion."""
        length = parse("5 m")
        result = length.to_by_ref(MetricUnit.CENTIMETER)
        self.assertIs(result, length)
        self.assertEqual(length.value, 500.0)
        self.assertIs(length.unit, MetricUnit.CENTIMETER)
        self.assertIsNone(length.to_original_string())

    def test_to_by_ref_same_unit(self):
        """Test that converting in place to the current unit changes nothing."""
        length = parse("5 m")
        length.to_by_ref(MetricUnit.METER)
        self.assertEqual(length.value, 5.0)
        self.assertEqual(length.to_original_string(), "5 m")

    def test_overflow(self):
        """Test that a non-finite conversion raises and leaves the length unchanged."""
        length = Length(1e300, MetricUnit.QUETTAMETER)
        with self.assertRaises(Overflow):
            length.to(MetricUnit.QUECTOMETER)
        with self.assertRaises(OverflowError):
            length.to_by_ref(MetricUnit.QUECTOMETER)
        self.assertEqual(length.value, 1e300)
        self.assertIs(length.unit, MetricUnit.QUETTAMETER)

    def test_huge_value_between_large_units(self):
        """Test that a finite result is returned when only the value in meters overflows."""
        length = Length(1e300, MetricUnit.YOTTAMETER)
        converted = length.to(MetricUnit.QUETTAMETER)
        self.assertIs(converted.unit, MetricUnit.QUETTAMETER)
        self.assertAlmostEqual(converted.value, 1e294, delta=1e294 * 1e-12)

        length.to_by_ref(MetricUnit.QUETTAMETER)
        self.assertEqual(length.value, converted.value)

    def test_round_trip(self):
        """Test that converting there and back is close to the start."""
        length = Length(123.456, ImperialUnit.FURLONG)
        for unit in REGISTRY:
            with self.subTest(unit=unit):
                self.assertTrue(length.to(unit).to(ImperialUnit.FURLONG).is_close(length, rel_tol=1e-12))


class TestArithmetic(unittest.TestCase):
    """Test addition, subtraction and scaling."""

    def test_add_keeps_left_unit(self):
        """Test that the right operand is converted to the left unit."""
        total = Length(1, MetricUnit.KILOMETER).add(Length(500, MetricUnit.METER))
        self.assertEqual(total.value, 1.5)
        self.assertIs(total.unit, MetricUnit.KILOMETER)

    def test_add_by_ref_chains(self):
        """Test that in-place operations return the receiver."""
        trip = Length(1, MetricUnit.KILOMETER)
        result = trip.add_by_ref(Length(500, MetricUnit.METER)).multiply_by_ref(2)
        self.assertIs(result, trip)
        self.assertEqual(trip.value, 3.0)
        self.assertIs(trip.unit, MetricUnit.KILOMETER)

    def test_subtract_may_go_negative(self):
        """Test that differences may be negative."""
        difference = Length(1, MetricUnit.METER).subtract(Length(2, MetricUnit.METER))
        self.assertEqual(difference.value, -1.0)

    def test_add_subtract_identity(self):
        """Test that adding then subtracting returns to the start."""
        start = Length(3.7, MetricUnit.KILOMETER)
        other = Length(12, ImperialUnit.MILE)
        self.assertTrue(start.add(other).subtract(other).is_close(start))

    def test_multiply_divide_identity(self):
        """Test that scaling then dividing returns to the start."""
        start = Length(7.3, ImperialUnit.YARD)
        self.assertTrue(start.multiply_by(3.3).divide_by(3.3).is_close(start))
        self.assertEqual(start.multiply_by(0).value, 0.0)

    def test_functional_and_by_ref_agree(self):
        """Test that both forms of every operation compute the same result."""
        other = Length(250, ImperialUnit.FOOT)
        operations = [
            ("to", "to_by_ref", NauticalUnit.CABLE),
            ("add", "add_by_ref", other),
            ("subtract", "subtract_by_ref", other),
            ("multiply_by", "multiply_by_ref", 2.5),
            ("divide_by", "divide_by_ref", 4),
        ]
        for functional, by_ref, argument in operations:
            with self.subTest(operation=functional):
                start = Length(1.25, MetricUnit.KILOMETER)
                expected = getattr(start, functional)(argument)
                result = getattr(start, by_ref)(argument)
                self.assertIs(result, start)
                self.assertEqual(result.value, expected.value)
                self.assertIs(result.unit, expected.unit)

    def test_divide_by_zero(self):
        """Test that dividing by zero raises and changes nothing."""
        length = Length(5, MetricUnit.METER)
        with self.assertRaises(DivisionByZero):
            length.divide_by(0)
        with self.assertRaises(ZeroDivisionError):
            length.divide_by_ref(0.0)
        self.assertEqual(length.value, 5.0)

    def test_overflow(self):
        """Test that non-finite sums and products raise."""
        big = Length(1e308, MetricUnit.METER)
        with self.assertRaises(Overflow):
            big.add(big)
        with self.assertRaises(Overflow):
            big.multiply_by(10)
        with self.assertRaises(Overflow):
            Length(1e300).divide_by(1e-300)
        with self.assertRaises(LengthError):
            big.add_by_ref(Length(1e308, MetricUnit.METER))
        self.assertEqual(big.value, 1e308)

    def test_transformations_forget_original(self):
        """Test that every transformation drops the parsed string."""
        one_meter = Length(1, MetricUnit.METER)
        results = [
            parse("2 km").add(one_meter),
            parse("2 km").subtract(one_meter),
            parse("2 km").multiply_by(2),
            parse("2 km").divide_by(2),
            parse("2000 m").normalize(),
            parse("2 km").add_by_ref(one_meter),
            parse("2000 m").normalize_by_ref(),
        ]
        for result in results:
            self.assertIsNone(result.to_original_string())

    def test_type_errors(self):
        """Test that lengths only add to lengths."""
        with self.assertRaises(TypeError):
            Length(1).add(1.0)


class TestOperators(unittest.TestCase):
    """Test the Python operator overloads."""

    def test_binary(self):
        """Test +, -, * and / between lengths and numbers."""
        a = Length(1, MetricUnit.KILOMETER)
        b = Length(500, MetricUnit.METER)
        self.assertEqual((a + b).value, 1.5)
        self.assertEqual((a - b).value, 0.5)
        self.assertEqual((a * 4).value, 4.0)
        self.assertEqual((4 * a).value, 4.0)
        self.assertEqual((a / 4).value, 0.25)
        with self.assertRaises(DivisionByZero):
            a / 0

    def test_unsupported(self):
        """Test that mixing lengths and bare numbers in sums is a type error."""
        with self.assertRaises(TypeError):
            Length(1) + 1
        with self.assertRaises(TypeError):
            Length(1) * Length(1)

    def test_in_place(self):
        """Test that augmented assignment mutates the same object."""
        length = Length(1, MetricUnit.KILOMETER)
        alias = length
        length += Length(1000, MetricUnit.METER)
        length *= 3
        length -= Length(1, MetricUnit.KILOMETER)
        length /= 5
        self.assertIs(length, alias)
        self.assertEqual(length.value, 1.0)

    def test_unary(self):
        """Test negation and absolute value."""
        length = Length(-2, ImperialUnit.FOOT)
        self.assertEqual((-length).value, 2.0)
        self.assertEqual(abs(length).value, 2.0)
        self.assertIs(abs(length).unit, ImperialUnit.FOOT)


class TestComparison(unittest.TestCase):
    """Test equality and ordering across units."""

    def test_equal_across_units(self):
        """Test that equality compares meters."""
        self.assertEqual(Length(1, MetricUnit.KILOMETER), Length(1000, MetricUnit.METER))
        self.assertNotEqual(Length(1, MetricUnit.KILOMETER), Length(1, MetricUnit.METER))
        self.assertNotEqual(Length(1), 1.0)

    def test_ordering(self):
        """Test ordering across families."""
        self.assertLess(Length(1, MetricUnit.KILOMETER), Length(1, ImperialUnit.MILE))
        self.assertGreater(Length(1, NauticalUnit.NAUTICAL_MILE), Length(1, ImperialUnit.MILE))
        self.assertLessEqual(Length(100, MetricUnit.CENTIMETER), Length(1, MetricUnit.METER))
        self.assertGreaterEqual(Length(1, MetricUnit.METER), Length(100, MetricUnit.CENTIMETER))
        lengths = [Length(1, ImperialUnit.FOOT), Length(1, ImperialUnit.INCH), Length(1, MetricUnit.METER)]
        self.assertEqual([length.unit for length in sorted(lengths)], [ImperialUnit.INCH, ImperialUnit.FOOT, MetricUnit.METER])

    def test_is_close(self):
        """Test tolerant comparison."""
        self.assertTrue(Length(12, ImperialUnit.INCH).is_close(Length(1, ImperialUnit.FOOT)))
        self.assertFalse(Length(1, MetricUnit.METER).is_close(Length(1.01, MetricUnit.METER)))
        self.assertTrue(Length(1, MetricUnit.METER).is_close(Length(1.01, MetricUnit.METER), abs_tol=0.05))

    def test_unhashable(self):
        """Test that mutable lengths cannot be hashed."""
        with self.assertRaises(TypeError):
            hash(Length(1))


class TestNormalize(unittest.TestCase):
    """Test picking the most natural unit."""

    def assertNormalizes(self, length, value, unit):
        normalized = length.normalize()
        self.assertIs(normalized.unit, unit)
        self.assertAlmostEqual(normalized.value, value, delta=abs(value) * 1e-12)

    def test_metric(self):
        """Test the largest unit with a magnitude of at least one."""
        self.assertNormalizes(Length(5000, MetricUnit.METER), 5.0, MetricUnit.KILOMETER)
        self.assertNormalizes(Length(0.5, MetricUnit.METER), 5.0, MetricUnit.DECIMETER)
        self.assertNormalizes(Length(1000, MetricUnit.METER), 1.0, MetricUnit.KILOMETER)
        self.assertNormalizes(Length(0.0042, MetricUnit.KILOMETER), 4.2, MetricUnit.METER)
        self.assertNormalizes(Length(-5000, MetricUnit.METER), -5.0, MetricUnit.KILOMETER)

    def test_beyond_family(self):
        """Test magnitudes outside the family range."""
        self.assertNormalizes(Length(1e40, MetricUnit.METER), 1e10, MetricUnit.QUETTAMETER)
        self.assertIs(Length(1e-40, MetricUnit.METER).normalize().unit, MetricUnit.QUECTOMETER)

    def test_other_families(self):
        """Test that normalization stays in the family in use."""
        self.assertNormalizes(Length(10000, ImperialUnit.FOOT), 10000 * 0.3048 / 1609.344, ImperialUnit.MILE)
        self.assertNormalizes(Length(0.25, ImperialUnit.INCH), 250.0, ImperialUnit.THOU)
        self.assertNormalizes(Length(3000, NauticalUnit.FATHOM), 3000 * 1.8288 / 1852, NauticalUnit.NAUTICAL_MILE)
        self.assertIs(Length(2e17, AstronomicalUnit.LIGHTSECOND).normalize().unit, AstronomicalUnit.GIGAPARSEC)

    def test_zero_keeps_unit(self):
        """Test that zero is never moved to another unit."""
        self.assertIs(Length(0, ImperialUnit.FURLONG).normalize().unit, ImperialUnit.FURLONG)

    def test_boundary_moves_to_larger_unit(self):
        """Test that a value exactly on a boundary moves up to the larger unit."""
        self.assertNormalizes(Length(10, MetricUnit.METER), 1.0, MetricUnit.DECAMETER)
        self.assertNormalizes(Length(100, MetricUnit.METER), 1.0, MetricUnit.HECTOMETER)
        self.assertNormalizes(Length(10, MetricUnit.HECTOMETER), 1.0, MetricUnit.KILOMETER)
        self.assertNormalizes(Length(1, MetricUnit.METER), 1.0, MetricUnit.METER)

    def test_boundary_with_float_noise(self):
        """Test that a boundary missed by rounding still moves up."""
        self.assertNormalizes(Length(12, ImperialUnit.INCH), 1.0, ImperialUnit.FOOT)
        self.assertNormalizes(Length(36, ImperialUnit.INCH), 1.0, ImperialUnit.YARD)

    def test_huge_values(self):
        """Test normalizing magnitudes whose value in meters overflows."""
        self.assertNormalizes(Length(1e300, MetricUnit.YOTTAMETER), 1e294, MetricUnit.QUETTAMETER)
        self.assertNormalizes(Length(1e300, AstronomicalUnit.MEGAPARSEC), 1e297, AstronomicalUnit.GIGAPARSEC)

    def test_natural_unit_does_not_mutate(self):
        """Test that choosing the unit leaves the length alone."""
        length = Length(5000, MetricUnit.METER)
        self.assertIs(length.natural_unit(), MetricUnit.KILOMETER)
        self.assertIs(length.unit, MetricUnit.METER)

    def test_normalize_by_ref(self):
        """Test in-place normalization."""
        length = Length(5000, MetricUnit.METER)
        self.assertIs(length.normalize_by_ref(), length)
        self.assertIs(length.unit, MetricUnit.KILOMETER)
        self.assertEqual(length.value, 5.0)

    def test_normalize_and_by_ref_agree(self):
        """Test that both normalize forms pick the same unit and value."""
        for unit in REGISTRY:
            for value in (0.0, 0.003, 1.0, 10.0, 12.5, 999.0, -4321.0, 7.5e6):
                with self.subTest(unit=unit, value=value):
                    expected = Length(value, unit).normalize()
                    length = Length(value, unit)
                    result = length.normalize_by_ref()
                    self.assertIs(result, length)
                    self.assertIs(result.unit, expected.unit)
                    self.assertEqual(result.value, expected.value)

    def test_idempotent(self):
        """Test that normalizing twice changes nothing more."""
        for unit in REGISTRY:
            for value in (1.0, 0.37, 12.5, 999.0, 1234.5, -42.0):
                with self.subTest(unit=unit, value=value):
                    once = Length(value, unit).normalize()
                    twice = once.normalize()
                    self.assertIs(twice.unit, once.unit)
                    self.assertEqual(twice.value, once.value)


if __name__ == "__main__":
    unittest.main()
