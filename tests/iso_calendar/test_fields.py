import unittest

from parameterized import parameterized

from iso_calendar.enums import ChronoUnit, DayOfWeek, IsoEra, Month
from iso_calendar.exceptions import FieldRangeError, UnsupportedUnitError
from iso_calendar.fields import ChronoField, ValueRange


class TestValueRange(unittest.TestCase):
    def test_variable_range(self):
        """Test a range where the maximum depends on context."""
        value_range = ValueRange.of(1, 28, 31)
        self.assertFalse(value_range.is_fixed())
        self.assertEqual(value_range.maximum, 31)
        self.assertEqual(str(value_range), "1 - 28/31")

    def test_fixed_range(self):
        value_range = ValueRange.of(0, 59)
        self.assertTrue(value_range.is_fixed())
        self.assertEqual(str(value_range), "0 - 59")

    def test_illegal_range(self):
        """Test that a minimum above the maximum is rejected."""
        with self.assertRaises(ValueError):
            ValueRange.of(10, 1)

    def test_check_valid_value_message(self):
        """Test that the error message names the field and its range."""
        with self.assertRaises(FieldRangeError) as err:
            ChronoField.DAY_OF_MONTH.check_valid_value(32)
        self.assertEqual("Invalid value for DayOfMonth (valid values 1 - 28/31): 32", str(err.exception))

    def test_int_value(self):
        """Test that the epoch day is not an int field but the day-of-month is."""
        self.assertFalse(ChronoField.EPOCH_DAY.range.is_int_value())
        self.assertTrue(ChronoField.DAY_OF_MONTH.range.is_valid_int_value(31))


class TestChronoField(unittest.TestCase):
    @parameterized.expand([
        ("day_of_month", ChronoField.DAY_OF_MONTH, ChronoUnit.DAYS, ChronoUnit.MONTHS),
        ("hour_of_day", ChronoField.HOUR_OF_DAY, ChronoUnit.HOURS, ChronoUnit.DAYS),
        ("proleptic_month", ChronoField.PROLEPTIC_MONTH, ChronoUnit.MONTHS, ChronoUnit.FOREVER),
    ])
    def test_units(self, _, field, base_unit, range_unit):
        self.assertEqual(field.base_unit, base_unit)
        self.assertEqual(field.range_unit, range_unit)

    def test_date_and_time_based(self):
        self.assertTrue(ChronoField.EPOCH_DAY.is_date_based)
        self.assertFalse(ChronoField.EPOCH_DAY.is_time_based)
        self.assertTrue(ChronoField.NANO_OF_DAY.is_time_based)
        self.assertFalse(ChronoField.INSTANT_SECONDS.is_date_based)
        self.assertFalse(ChronoField.OFFSET_SECONDS.is_time_based)

    def test_str(self):
        self.assertEqual(str(ChronoField.MONTH_OF_YEAR), "MonthOfYear")


class TestEnums(unittest.TestCase):
    @parameterized.expand([
        ("january", Month.JANUARY, False, 1),
        ("february", Month.FEBRUARY, True, 32),
        ("march_leap", Month.MARCH, True, 61),
        ("march", Month.MARCH, False, 60),
        ("december", Month.DECEMBER, False, 335),
        ("december_leap", Month.DECEMBER, True, 336),
    ])
    def test_first_day_of_year(self, _, month, leap, expected):
        self.assertEqual(month.first_day_of_year(leap), expected)

    def test_month_lengths(self):
        """Test that the month lengths add up to the length of the year."""
        self.assertEqual(sum(month.length(False) for month in Month), 365)
        self.assertEqual(sum(month.length(True) for month in Month), 366)
        self.assertEqual(Month.FEBRUARY.max_length(), 29)

    def test_wrapping(self):
        self.assertEqual(Month.DECEMBER.plus(1), Month.JANUARY)
        self.assertEqual(Month.JANUARY.plus(-1), Month.DECEMBER)
        self.assertEqual(DayOfWeek.SUNDAY.plus(1), DayOfWeek.MONDAY)
        self.assertEqual(DayOfWeek.MONDAY.plus(-8), DayOfWeek.SUNDAY)

    def test_of_out_of_range(self):
        with self.assertRaises(FieldRangeError):
            Month.of(13)
        with self.assertRaises(FieldRangeError):
            DayOfWeek.of(0)
        with self.assertRaises(FieldRangeError):
            IsoEra.of(2)

    def test_unit_classification(self):
        self.assertTrue(ChronoUnit.HALF_DAYS.is_time_based)
        self.assertFalse(ChronoUnit.DAYS.is_time_based)
        self.assertTrue(ChronoUnit.DAYS.is_date_based)
        self.assertFalse(ChronoUnit.FOREVER.is_date_based)
        self.assertEqual(ChronoUnit.HOURS.duration_nanos, 3_600_000_000_000)

    def test_unit_without_exact_duration(self):
        with self.assertRaises(UnsupportedUnitError):
            ChronoUnit.MONTHS.duration_nanos  # noqa: B018
