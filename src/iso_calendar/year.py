"""
Year: a single year in the proleptic ISO calendar.

The proleptic year numbering includes a year zero: year 0 is 1 BCE, year -1 is 2 BCE and so on. The leap-year rule
defined here by :func:`is_leap` is the canonical one reused by every other type in the package.

Example usage:

    y = Year.of(2024)
    y.is_leap()                    # True
    y.at_day(60)                   # LocalDate 2024-02-29
    y.plus(2, ChronoUnit.DECADES)  # Year 2044
"""

from typing import TYPE_CHECKING, Any

from iso_calendar.enums import ChronoUnit, Month
from iso_calendar.exceptions import UnsupportedFieldError, UnsupportedUnitError
from iso_calendar.fields import YEAR_MAX, YEAR_MIN, ChronoField, ValueRange
from iso_calendar.parsing import YEAR, TextPattern, parse_year
from iso_calendar.utils import add_exact, multiply_exact, trunc_div

if TYPE_CHECKING:
    from iso_calendar.local_date import LocalDate

_SUPPORTED_FIELDS = frozenset([ChronoField.YEAR, ChronoField.YEAR_OF_ERA, ChronoField.ERA])
_SUPPORTED_UNITS = frozenset(
    [ChronoUnit.YEARS, ChronoUnit.DECADES, ChronoUnit.CENTURIES, ChronoUnit.MILLENNIA, ChronoUnit.ERAS]
)

_YEAR_PATTERN = TextPattern("a Year", (YEAR,))


def is_leap(year: int) -> bool:
    """Check if a proleptic year is a leap year.

    Every fourth year is a leap year, except for century years that are not divisible by 400.

    Args:
        year: The proleptic year.

    Returns:
        True if the year is a leap year.
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


class Year:
    """A year in the proleptic ISO calendar, such as 2024.

    Year instances are immutable, hashable and sortable.
    """

    __slots__ = ("_year",)

    MIN_VALUE = YEAR_MIN
    MAX_VALUE = YEAR_MAX

    def __init__(self, year: int) -> None:
        # Use Year.of to construct a validated instance
        self._year = year

    @staticmethod
    def of(iso_year: int) -> "Year":
        """Return a Year for the given proleptic year.

        Args:
            iso_year: The proleptic year, from MIN_VALUE to MAX_VALUE.

        Returns:
            A Year object

        Raises:
            FieldRangeError: If the year is out of range.
        """
        ChronoField.YEAR.check_valid_value(iso_year)
        return Year(iso_year)

    @staticmethod
    def from_temporal(temporal: Any) -> "Year":
        """Return a Year extracted from any object supporting the YEAR field.

        Args:
            temporal: A Year, or an object with a ``get(ChronoField.YEAR)`` method.

        Returns:
            A Year object
        """
        if isinstance(temporal, Year):
            return temporal
        return Year.of(temporal.get(ChronoField.YEAR))

    @staticmethod
    def parse(text: str) -> "Year":
        """Return a Year from text such as ``2024``, ``-0044`` or ``+10000``.

        Four digits are required; more than four digits require an explicit sign.

        Args:
            text: The text to parse.

        Returns:
            A Year object

        Raises:
            DateTimeParseError: If the text is not a valid year.
        """
        return Year.of(parse_year(text, _YEAR_PATTERN.match(text)))

    @property
    def value(self) -> int:
        """The proleptic year value"""
        return self._year

    def is_leap(self) -> bool:
        return is_leap(self._year)

    def length(self) -> int:
        """The number of days in this year, 365 or 366."""
        return 366 if self.is_leap() else 365

    def is_valid_month_day(self, month: int, day_of_month: int) -> bool:
        """Check if a month and day-of-month form a valid date in this year.

        Args:
            month: The month-of-year, from 1 to 12.
            day_of_month: The day-of-month.

        Returns:
            True if the month-day exists in this year (so February 29th is only valid in leap years).
        """
        if not 1 <= month <= 12:
            return False
        return 1 <= day_of_month <= Month.of(month).length(self.is_leap())

    def at_day(self, day_of_year: int) -> "LocalDate":
        """Combine this year with a day-of-year to create a date.

        Args:
            day_of_year: The day-of-year, from 1 to 365 (or 366 in a leap year).

        Returns:
            The LocalDate

        Raises:
            FieldRangeError: If the day-of-year is out of range.
            InvalidDateError: If the day-of-year is 366 and this is not a leap year.
        """
        from iso_calendar.local_date import LocalDate  # noqa: PLC0415

        return LocalDate.of_year_day(self._year, day_of_year)

    def at_month(self, month: int) -> "LocalDate":
        """Return the first day of the given month in this year."""
        from iso_calendar.local_date import LocalDate  # noqa: PLC0415

        return LocalDate.of(self._year, month, 1)

    def at_month_day(self, month: int, day_of_month: int) -> "LocalDate":
        """Combine this year with a month and day-of-month to create a date.

        A month-day of February 29th is adjusted to February 28th if this year is not a leap year.

        Args:
            month: The month-of-year, from 1 to 12.
            day_of_month: The day-of-month, from 1 to the maximum length of the month.

        Returns:
            The LocalDate

        Raises:
            FieldRangeError: If the month or day-of-month is out of range.
        """
        from iso_calendar.local_date import LocalDate  # noqa: PLC0415

        moy = Month.of(month)
        ValueRange.of(1, moy.max_length()).check_valid_value(day_of_month, ChronoField.DAY_OF_MONTH)
        if moy is Month.FEBRUARY and day_of_month == 29 and not self.is_leap():
            day_of_month = 28
        return LocalDate.of(self._year, month, day_of_month)

    # --------------------------------------------------------------------------
    # Field protocol
    # --------------------------------------------------------------------------
    def is_supported(self, field_or_unit: ChronoField | ChronoUnit) -> bool:
        """Check if a field or unit is supported.

        The supported fields are YEAR, YEAR_OF_ERA and ERA. The supported units are YEARS, DECADES, CENTURIES,
        MILLENNIA and ERAS.
        """
        if isinstance(field_or_unit, ChronoUnit):
            return field_or_unit in _SUPPORTED_UNITS
        return field_or_unit in _SUPPORTED_FIELDS

    def range(self, field: ChronoField) -> ValueRange:
        if field == ChronoField.YEAR_OF_ERA:
            return ValueRange.of(1, YEAR_MAX + 1) if self._year <= 0 else ValueRange.of(1, YEAR_MAX)
        if field in _SUPPORTED_FIELDS:
            return field.range
        raise UnsupportedFieldError(f"Unsupported field: {field}")

    def get(self, field: ChronoField) -> int:
        return self.range(field).check_valid_int_value(self.get_long(field), field)

    def get_long(self, field: ChronoField) -> int:
        """Get the value of a field.

        Args:
            field: One of YEAR, YEAR_OF_ERA or ERA.

        Returns:
            The field value

        Raises:
            UnsupportedFieldError: If the field is not supported.
        """
        if field == ChronoField.YEAR_OF_ERA:
            return 1 - self._year if self._year < 1 else self._year
        if field == ChronoField.YEAR:
            return self._year
        if field == ChronoField.ERA:
            return 0 if self._year < 1 else 1
        raise UnsupportedFieldError(f"Unsupported field: {field}")

    def with_field(self, field: ChronoField, new_value: int) -> "Year":
        """Return a copy of this year with a field changed.

        Setting the ERA to the current era returns this instance; otherwise the year is mirrored around year 1,
        so 2024 CE becomes 2023 BCE (proleptic year -2023).

        Args:
            field: One of YEAR, YEAR_OF_ERA or ERA.
            new_value: The new value of the field.

        Returns:
            A Year object

        Raises:
            UnsupportedFieldError: If the field is not supported.
            FieldRangeError: If the value is out of range.
        """
        if field not in _SUPPORTED_FIELDS:
            raise UnsupportedFieldError(f"Unsupported field: {field}")
        field.check_valid_value(new_value)
        if field == ChronoField.YEAR_OF_ERA:
            return Year.of(new_value if self._year >= 1 else 1 - new_value)
        if field == ChronoField.YEAR:
            return Year.of(new_value)
        return self if self.get_long(ChronoField.ERA) == new_value else Year.of(1 - self._year)

    def adjust_into(self, temporal: Any) -> Any:
        """Set the year of another temporal object to this year."""
        return temporal.with_field(ChronoField.YEAR, self._year)

    # --------------------------------------------------------------------------
    # Arithmetic
    # --------------------------------------------------------------------------
    def plus(self, amount: Any, unit: ChronoUnit | None = None) -> "Year":
        """Return a copy of this year with an amount added.

        Args:
            amount: The number of units to add, or an amount object (such as a Period) when no unit is given.
            unit: One of YEARS, DECADES, CENTURIES, MILLENNIA or ERAS.

        Returns:
            A Year object

        Raises:
            UnsupportedUnitError: If the unit is not supported.
            ArithmeticOverflowError: If the calculation overflows.
        """
        if unit is None:
            return amount.add_to(self)
        if unit == ChronoUnit.YEARS:
            return self.plus_years(amount)
        if unit == ChronoUnit.DECADES:
            return self.plus_years(multiply_exact(amount, 10))
        if unit == ChronoUnit.CENTURIES:
            return self.plus_years(multiply_exact(amount, 100))
        if unit == ChronoUnit.MILLENNIA:
            return self.plus_years(multiply_exact(amount, 1_000))
        if unit == ChronoUnit.ERAS:
            return self.with_field(ChronoField.ERA, add_exact(self.get_long(ChronoField.ERA), amount))
        raise UnsupportedUnitError(f"Unsupported unit: {unit}")

    def minus(self, amount: Any, unit: ChronoUnit | None = None) -> "Year":
        if unit is None:
            return amount.subtract_from(self)
        return self.plus(-amount, unit)

    def plus_years(self, years_to_add: int) -> "Year":
        if years_to_add == 0:
            return self
        return Year.of(ChronoField.YEAR.check_valid_int_value(self._year + years_to_add))

    def minus_years(self, years_to_subtract: int) -> "Year":
        return self.plus_years(-years_to_subtract)

    def until(self, end_exclusive: Any, unit: ChronoUnit) -> int:
        """Calculate the amount of time until another year in terms of the given unit.

        Args:
            end_exclusive: The end year, or any object supporting the YEAR field.
            unit: One of YEARS, DECADES, CENTURIES, MILLENNIA or ERAS.

        Returns:
            The number of complete units between the two years, negative if the end is before this year.

        Raises:
            UnsupportedUnitError: If the unit is not supported.
        """
        end = Year.from_temporal(end_exclusive)
        years_until = end.value - self._year
        if unit == ChronoUnit.YEARS:
            return years_until
        if unit == ChronoUnit.DECADES:
            return trunc_div(years_until, 10)
        if unit == ChronoUnit.CENTURIES:
            return trunc_div(years_until, 100)
        if unit == ChronoUnit.MILLENNIA:
            return trunc_div(years_until, 1_000)
        if unit == ChronoUnit.ERAS:
            return end.get_long(ChronoField.ERA) - self.get_long(ChronoField.ERA)
        raise UnsupportedUnitError(f"Unsupported unit: {unit}")

    # --------------------------------------------------------------------------
    # Comparison
    # --------------------------------------------------------------------------
    def compare_to(self, other: "Year") -> int:
        return self._year - other._year

    def is_after(self, other: "Year") -> bool:
        return self._year > other._year

    def is_before(self, other: "Year") -> bool:
        return self._year < other._year

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Year):
            return self._year == other._year
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._year)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __str__(self) -> str:
        return str(self._year)

    def __repr__(self) -> str:
        return f"Year({self._year})"
