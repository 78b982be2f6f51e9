import unittest

from parameterized import parameterized

from iso_calendar.enums import ChronoUnit
from iso_calendar.exceptions import (
    DateTimeParseError,
    FieldRangeError,
    InvalidDateError,
    UnsupportedFieldError,
    UnsupportedUnitError,
)
from iso_calendar.fields import ChronoField
from iso_calendar.local_date import LocalDate
from iso_calendar.year import Year, is_leap


class TestIsLeap(unittest.TestCase):
    @parameterized.expand([
        ("divisible_by_4", 2024, True),
        ("not_divisible_by_4", 2023, False),
        ("century", 1900, False),
        ("fourth_century", 2000, True),
        ("year_zero", 0, True),
        ("negative", -4, True),
        ("negative_century", -100, False),
        ("negative_fourth_century", -400, True),
    ])
    def test_is_leap(self, _, year, expected):
        self.assertEqual(is_leap(year), expected)
        self.assertEqual(Year.of(year).is_leap(), expected)
        self.assertEqual(Year.of(year).length(), 366 if expected else 365)


class TestYearFactories(unittest.TestCase):
    def test_of_bounds(self):
        self.assertEqual(Year.of(Year.MAX_VALUE).value, 999_999_999)
        self.assertEqual(Year.of(Year.MIN_VALUE).value, -999_999_999)
        with self.assertRaises(FieldRangeError):
            Year.of(1_000_000_000)

    @parameterized.expand([
        ("four_digits", "2024", 2024),
        ("negative", "-0044", -44),
        ("signed_five_digits", "+10000", 10000),
        ("negative_five_digits", "-10000", -10000),
    ])
    def test_parse(self, _, text, expected):
        self.assertEqual(Year.parse(text), Year.of(expected))

    @parameterized.expand([
        ("unsigned_five_digits", "10000", 0),
        ("signed_four_digits", "+2024", 0),
        ("three_digits", "202", 0),
        ("text", "year", 0),
        ("trailing_text", "2024x", 4),
        ("trailing_newline", "2024\n", 4),
        ("fullwidth_digits", "\uff12\uff10\uff12\uff14", 0),
    ])
    def test_parse_invalid(self, _, text, error_index):
        with self.assertRaises(DateTimeParseError) as err:
            Year.parse(text)
        self.assertEqual(err.exception.error_index, error_index)

    def test_from_temporal(self):
        self.assertEqual(Year.from_temporal(LocalDate.of(2024, 5, 1)), Year.of(2024))


class TestYearDates(unittest.TestCase):
    def test_at_day(self):
        self.assertEqual(Year.of(2024).at_day(60), LocalDate.of(2024, 2, 29))
        self.assertEqual(Year.of(2023).at_day(365), LocalDate.of(2023, 12, 31))

    def test_at_day_366_in_non_leap_year(self):
        with self.assertRaises(InvalidDateError):
            Year.of(2023).at_day(366)

    def test_at_month(self):
        """Test the date is the first of the month."""
        self.assertEqual(Year.of(2024).at_month(6), LocalDate.of(2024, 6, 1))

    def test_at_month_day_adjusts_leap_day(self):
        """Test February 29th becomes the 28th outside a leap year."""
        self.assertEqual(Year.of(2023).at_month_day(2, 29), LocalDate.of(2023, 2, 28))
        self.assertEqual(Year.of(2024).at_month_day(2, 29), LocalDate.of(2024, 2, 29))

    def test_at_month_day_out_of_range(self):
        with self.assertRaises(FieldRangeError):
            Year.of(2024).at_month_day(4, 31)

    @parameterized.expand([
        ("valid", 2, 28, True),
        ("leap_day", 2, 29, False),
        ("bad_month", 13, 1, False),
        ("bad_day", 4, 31, False),
    ])
    def test_is_valid_month_day(self, _, month, day, expected):
        self.assertEqual(Year.of(2023).is_valid_month_day(month, day), expected)


class TestYearFields(unittest.TestCase):
    @parameterized.expand([
        ("ce", 2024, 2024, 1),
        ("year_one", 1, 1, 1),
        ("year_zero", 0, 1, 0),
        ("bce", -5, 6, 0),
    ])
    def test_year_of_era_and_era(self, _, year, year_of_era, era):
        self.assertEqual(Year.of(year).get(ChronoField.YEAR_OF_ERA), year_of_era)
        self.assertEqual(Year.of(year).get(ChronoField.ERA), era)

    def test_unsupported_field(self):
        self.assertFalse(Year.of(2024).is_supported(ChronoField.MONTH_OF_YEAR))
        with self.assertRaises(UnsupportedFieldError):
            Year.of(2024).get(ChronoField.MONTH_OF_YEAR)

    def test_with_era_mirrors_year(self):
        """Test that changing the era mirrors the year around year 1."""
        self.assertEqual(Year.of(2024).with_field(ChronoField.ERA, 0), Year.of(-2023))
        year = Year.of(2024)
        self.assertIs(year.with_field(ChronoField.ERA, 1), year)

    def test_with_year_of_era_in_bce(self):
        self.assertEqual(Year.of(-5).with_field(ChronoField.YEAR_OF_ERA, 10), Year.of(-9))

    def test_adjust_into(self):
        self.assertEqual(LocalDate.of(2024, 2, 29).with_adjuster(Year.of(2023)), LocalDate.of(2023, 2, 28))


class TestYearArithmetic(unittest.TestCase):
    @parameterized.expand([
        ("years", 3, ChronoUnit.YEARS, 2027),
        ("decades", 2, ChronoUnit.DECADES, 2044),
        ("centuries", -1, ChronoUnit.CENTURIES, 1924),
        ("millennia", 1, ChronoUnit.MILLENNIA, 3024),
    ])
    def test_plus(self, _, amount, unit, expected):
        self.assertEqual(Year.of(2024).plus(amount, unit), Year.of(expected))
        self.assertEqual(Year.of(expected).minus(amount, unit), Year.of(2024))

    def test_plus_zero_is_identity(self):
        year = Year.of(2024)
        self.assertIs(year.plus_years(0), year)

    def test_plus_overflow(self):
        with self.assertRaises(FieldRangeError):
            Year.of(Year.MAX_VALUE).plus_years(1)

    def test_plus_unsupported_unit(self):
        with self.assertRaises(UnsupportedUnitError):
            Year.of(2024).plus(1, ChronoUnit.MONTHS)

    @parameterized.expand([
        ("years", ChronoUnit.YEARS, 19),
        ("decades", ChronoUnit.DECADES, 1),
        ("centuries", ChronoUnit.CENTURIES, 0),
    ])
    def test_until(self, _, unit, expected):
        self.assertEqual(Year.of(2005).until(Year.of(2024), unit), expected)
        self.assertEqual(Year.of(2024).until(Year.of(2005), unit), -expected)

    def test_until_eras(self):
        self.assertEqual(Year.of(-10).until(Year.of(10), ChronoUnit.ERAS), 1)


class TestYearComparison(unittest.TestCase):
    def test_ordering(self):
        years = [Year.of(2024), Year.of(-1), Year.of(0)]
        self.assertEqual(sorted(years), [Year.of(-1), Year.of(0), Year.of(2024)])
        self.assertTrue(Year.of(2024).is_after(Year.of(2023)))
        self.assertTrue(Year.of(2023).is_before(Year.of(2024)))

    def test_ordering_against_other_types(self):
        with self.assertRaises(TypeError):
            _ = Year.of(2024) < 2025  # noqa - expecting type error
        with self.assertRaises(TypeError):
            _ = Year.of(2024) >= LocalDate.of(2024, 1, 1)  # noqa - expecting type error
        with self.assertRaises(TypeError):
            sorted([Year.of(2024), "2023"])

    def test_equality_and_hash(self):
        self.assertEqual(Year.of(2024), Year.of(2024))
        self.assertEqual(len({Year.of(2024), Year.of(2024)}), 1)
        self.assertNotEqual(Year.of(2024), 2024)

    def test_str_and_repr(self):
        self.assertEqual(str(Year.of(-44)), "-44")
        self.assertEqual(repr(Year.of(2024)), "Year(2024)")
