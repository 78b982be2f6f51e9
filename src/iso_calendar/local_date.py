"""
LocalDate: a date without a time or offset in the proleptic ISO calendar, such as ``2024-02-29``.

The date is stored as a (year, month, day) triple that is always valid. The linear representation used for
day arithmetic is the *epoch day*, the count of days since 1970-01-01.

Arithmetic in years and months clamps to the end of the month when the original day does not exist in the target
month, so ``2008-02-29`` plus one year is ``2009-02-28``. Direct assignment of the day (``of``,
``with_day_of_month``) never clamps and raises :class:`InvalidDateError` instead.

Example usage:

    d = LocalDate.of(2007, 3, 31)
    d.plus_months(1)                             # 2007-04-30
    d.until(LocalDate.of(2008, 5, 2))            # Period P1Y1M2D
    list(d.dates_until(LocalDate.of(2007, 4, 3)))  # 2007-03-31, 2007-04-01, 2007-04-02
"""

import datetime as dt
import re
from collections.abc import Callable, Iterator, Sequence
from typing import TYPE_CHECKING, Any, overload

from iso_calendar.enums import SECONDS_PER_DAY, ChronoUnit, DayOfWeek, IsoEra, Month
from iso_calendar.exceptions import (
    DateTimeParseError,
    InvalidDateError,
    UnsupportedFieldError,
    UnsupportedUnitError,
)
from iso_calendar.fields import YEAR_MAX, YEAR_MIN, ChronoField, ValueRange
from iso_calendar.local_time import LocalTime
from iso_calendar.parsing import DATE_PARTS, TextPattern, parse_field, parse_year
from iso_calendar.period import Period
from iso_calendar.utils import add_exact, multiply_exact, trunc_div
from iso_calendar.year import is_leap

if TYPE_CHECKING:
    from iso_calendar.instant import Instant
    from iso_calendar.local_date_time import LocalDateTime
    from iso_calendar.zone_offset import ZoneOffset

DAYS_PER_CYCLE = 146_097
DAYS_0000_TO_1970 = DAYS_PER_CYCLE * 5 - (30 * 365 + 7)

DATE_FIELDS = frozenset(
    [
        ChronoField.DAY_OF_WEEK,
        ChronoField.ALIGNED_DAY_OF_WEEK_IN_MONTH,
        ChronoField.ALIGNED_DAY_OF_WEEK_IN_YEAR,
        ChronoField.DAY_OF_MONTH,
        ChronoField.DAY_OF_YEAR,
        ChronoField.EPOCH_DAY,
        ChronoField.ALIGNED_WEEK_OF_MONTH,
        ChronoField.ALIGNED_WEEK_OF_YEAR,
        ChronoField.MONTH_OF_YEAR,
        ChronoField.PROLEPTIC_MONTH,
        ChronoField.YEAR_OF_ERA,
        ChronoField.YEAR,
        ChronoField.ERA,
    ]
)

_DATE_PATTERN = TextPattern("a LocalDate", DATE_PARTS)


def format_year(year: int) -> str:
    """Format a proleptic year with at least four digits, signing it when negative or beyond 9999."""
    if year < 0:
        return f"-{-year:04}"
    if year > 9999:
        return f"+{year}"
    return f"{year:04}"


def match_date(text: str, matcher: re.Match) -> "LocalDate":
    """Build a LocalDate from a match defining the groups year, month and day.

    Raises:
        DateTimeParseError: If the matched values do not form a valid date, carrying the index of the bad group.
    """
    year = parse_year(text, matcher)
    month = parse_field(text, matcher, "month", ChronoField.MONTH_OF_YEAR)
    day = parse_field(text, matcher, "day", ChronoField.DAY_OF_MONTH)
    try:
        return LocalDate._create(year, month, day)
    except InvalidDateError as err:
        raise DateTimeParseError(f"Text '{text}' could not be parsed: {err}", text, matcher.start("day")) from err


class LocalDate:
    """A date without a time or offset in the proleptic ISO calendar, such as ``2024-02-29``.

    LocalDate instances are immutable, hashable and sortable. They should be created with one of the ``of...``
    factories or :meth:`parse`.
    """

    __slots__ = ("_year", "_month", "_day")

    MIN: "LocalDate"
    MAX: "LocalDate"
    EPOCH: "LocalDate"

    def __init__(self, year: int, month: int, day_of_month: int) -> None:
        # Use one of the of_... factories to construct a validated instance
        self._year = year
        self._month = month
        self._day = day_of_month

    # --------------------------------------------------------------------------
    # Factories
    # --------------------------------------------------------------------------
    @staticmethod
    def of(year: int, month: int | Month, day_of_month: int) -> "LocalDate":
        """Return a LocalDate from a year, month and day.

        Args:
            year: The proleptic year, from -999,999,999 to 999,999,999.
            month: The month-of-year, from 1 to 12, or a Month.
            day_of_month: The day-of-month, from 1 to 31.

        Returns:
            A LocalDate object

        Raises:
            FieldRangeError: If any value is out of range.
            InvalidDateError: If the day-of-month is invalid for the month-year.
        """
        if isinstance(month, Month):
            month = month.value
        ChronoField.YEAR.check_valid_value(year)
        ChronoField.MONTH_OF_YEAR.check_valid_value(month)
        ChronoField.DAY_OF_MONTH.check_valid_value(day_of_month)
        return LocalDate._create(year, month, day_of_month)

    @staticmethod
    def of_year_day(year: int, day_of_year: int) -> "LocalDate":
        """Return a LocalDate from a year and day-of-year.

        Args:
            year: The proleptic year.
            day_of_year: The day-of-year, from 1 to 366.

        Returns:
            A LocalDate object

        Raises:
            FieldRangeError: If either value is out of range.
            InvalidDateError: If the day-of-year is 366 and the year is not a leap year.
        """
        ChronoField.YEAR.check_valid_value(year)
        ChronoField.DAY_OF_YEAR.check_valid_value(day_of_year)
        leap = is_leap(year)
        if day_of_year == 366 and not leap:
            raise InvalidDateError(f"Invalid date 'DayOfYear 366' as '{year}' is not a leap year")
        moy = Month.of((day_of_year - 1) // 31 + 1)
        month_end = moy.first_day_of_year(leap) + moy.length(leap) - 1
        if day_of_year > month_end:
            moy = moy.plus(1)
        dom = day_of_year - moy.first_day_of_year(leap) + 1
        return LocalDate(year, moy.value, dom)

    @staticmethod
    def of_epoch_day(epoch_day: int) -> "LocalDate":
        """Return a LocalDate from an epoch day count, where day 0 is 1970-01-01.

        Args:
            epoch_day: The epoch day.

        Returns:
            A LocalDate object

        Raises:
            FieldRangeError: If the epoch day is outside the supported date range.
        """
        ChronoField.EPOCH_DAY.check_valid_value(epoch_day)
        zero_day = epoch_day + DAYS_0000_TO_1970
        # Shift to a year starting on March 1st so the leap day falls at the end of the cycle
        zero_day -= 60
        adjust = 0
        if zero_day < 0:
            adjust_cycles = trunc_div(zero_day + 1, DAYS_PER_CYCLE) - 1
            adjust = adjust_cycles * 400
            zero_day += -adjust_cycles * DAYS_PER_CYCLE
        year_est = (400 * zero_day + 591) // DAYS_PER_CYCLE
        doy_est = zero_day - (365 * year_est + year_est // 4 - year_est // 100 + year_est // 400)
        if doy_est < 0:
            year_est -= 1
            doy_est = zero_day - (365 * year_est + year_est // 4 - year_est // 100 + year_est // 400)
        year_est += adjust
        march_doy0 = doy_est

        # Convert the March-based values back to a January-based month and day
        march_month0 = (march_doy0 * 5 + 2) // 153
        month = (march_month0 + 2) % 12 + 1
        dom = march_doy0 - (march_month0 * 306 + 5) // 10 + 1
        year_est += march_month0 // 10

        year = ChronoField.YEAR.check_valid_int_value(year_est)
        return LocalDate(year, month, dom)

    @staticmethod
    def of_instant(instant: "Instant", offset: "ZoneOffset") -> "LocalDate":
        """Return the LocalDate of an instant as seen at the given offset."""
        local_second = instant.epoch_second + offset.total_seconds
        return LocalDate.of_epoch_day(local_second // SECONDS_PER_DAY)

    @staticmethod
    def of_date(date: dt.date) -> "LocalDate":
        """Convert a standard library ``datetime.date`` (or ``datetime.datetime``, dropping the time)."""
        return LocalDate(date.year, date.month, date.day)

    @staticmethod
    def from_temporal(temporal: Any) -> "LocalDate":
        """Return the LocalDate of any object that has a date part.

        Args:
            temporal: A LocalDate, a standard library date, or an object with a ``to_local_date`` method.

        Returns:
            A LocalDate object

        Raises:
            UnsupportedFieldError: If no date can be obtained.
        """
        if isinstance(temporal, LocalDate):
            return temporal
        if isinstance(temporal, dt.date):
            return LocalDate.of_date(temporal)
        to_local_date = getattr(temporal, "to_local_date", None)
        if to_local_date is None:
            raise UnsupportedFieldError(f"Unable to obtain LocalDate from {type(temporal).__name__}: {temporal!r}")
        return to_local_date()

    @staticmethod
    def parse(text: str) -> "LocalDate":
        """Return a LocalDate from ISO text such as ``2024-02-29``, ``-0044-03-15`` or ``+10000-01-01``.

        Args:
            text: The text to parse.

        Returns:
            A LocalDate object

        Raises:
            DateTimeParseError: If the text is malformed or names an invalid date.
        """
        matcher = _DATE_PATTERN.match(text)
        return match_date(text, matcher)

    @staticmethod
    def _create(year: int, month: int, day_of_month: int) -> "LocalDate":
        if day_of_month > 28:
            leap = is_leap(year)
            if day_of_month > Month(month).length(leap):
                if day_of_month == 29:
                    raise InvalidDateError(f"Invalid date 'February 29' as '{year}' is not a leap year")
                raise InvalidDateError(f"Invalid date '{Month(month).name} {day_of_month}'")
        return LocalDate(year, month, day_of_month)

    @staticmethod
    def _resolve_previous_valid(year: int, month: int, day_of_month: int) -> "LocalDate":
        """Build a date, moving an invalid day back to the last valid day of the month."""
        if month == 2:
            day_of_month = min(day_of_month, 29 if is_leap(year) else 28)
        elif month in (4, 6, 9, 11):
            day_of_month = min(day_of_month, 30)
        return LocalDate(year, month, day_of_month)

    # --------------------------------------------------------------------------
    # Accessors
    # --------------------------------------------------------------------------
    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        """The month-of-year, from 1 to 12"""
        return self._month

    @property
    def month_enum(self) -> Month:
        return Month(self._month)

    @property
    def day(self) -> int:
        """The day-of-month, from 1 to 31"""
        return self._day

    @property
    def day_of_year(self) -> int:
        return self.month_enum.first_day_of_year(self.is_leap_year()) + self._day - 1

    @property
    def day_of_week(self) -> DayOfWeek:
        return DayOfWeek((self.to_epoch_day() + 3) % 7 + 1)

    @property
    def era(self) -> IsoEra:
        return IsoEra.CE if self._year >= 1 else IsoEra.BCE

    def is_leap_year(self) -> bool:
        return is_leap(self._year)

    def length_of_month(self) -> int:
        return self.month_enum.length(self.is_leap_year())

    def length_of_year(self) -> int:
        return 366 if self.is_leap_year() else 365

    def _proleptic_month(self) -> int:
        return self._year * 12 + self._month - 1

    def to_epoch_day(self) -> int:
        """Convert to the count of days since 1970-01-01, negative for earlier dates."""
        y = self._year
        m = self._month
        total = 365 * y
        if y >= 0:
            total += (y + 3) // 4 - (y + 99) // 100 + (y + 399) // 400
        else:
            total -= (-y) // 4 - (-y) // 100 + (-y) // 400
        total += (367 * m - 362) // 12
        total += self._day - 1
        if m > 2:
            total -= 1
            if not self.is_leap_year():
                total -= 1
        return total - DAYS_0000_TO_1970

    def to_epoch_second(self, time: LocalTime, offset: "ZoneOffset") -> int:
        """Combine with a time and offset to calculate the seconds since 1970-01-01T00:00:00Z."""
        return self.to_epoch_day() * SECONDS_PER_DAY + time.to_second_of_day() - offset.total_seconds

    def to_date(self) -> dt.date:
        """Convert to a standard library ``datetime.date``.

        Raises:
            FieldRangeError: If the year is outside the 1 to 9999 range of ``datetime.date``.
        """
        ValueRange.of(dt.MINYEAR, dt.MAXYEAR).check_valid_value(self._year, ChronoField.YEAR)
        return dt.date(self._year, self._month, self._day)

    def at_time(self, time: LocalTime) -> "LocalDateTime":
        from iso_calendar.local_date_time import LocalDateTime  # noqa: PLC0415

        return LocalDateTime.of(self, time)

    def at_start_of_day(self) -> "LocalDateTime":
        return self.at_time(LocalTime.MIDNIGHT)

    # --------------------------------------------------------------------------
    # Field protocol
    # --------------------------------------------------------------------------
    def is_supported(self, field_or_unit: ChronoField | ChronoUnit) -> bool:
        if isinstance(field_or_unit, ChronoUnit):
            return field_or_unit.is_date_based
        return field_or_unit in DATE_FIELDS

    def range(self, field: ChronoField) -> ValueRange:
        """The range of valid values for a field, taking this date into account.

        Raises:
            UnsupportedFieldError: If the field is not a date field.
        """
        if field not in DATE_FIELDS:
            raise UnsupportedFieldError(f"Unsupported field: {field}")
        if field == ChronoField.DAY_OF_MONTH:
            return ValueRange.of(1, self.length_of_month())
        if field == ChronoField.DAY_OF_YEAR:
            return ValueRange.of(1, self.length_of_year())
        if field == ChronoField.ALIGNED_WEEK_OF_MONTH:
            short_month = self._month == 2 and not self.is_leap_year()
            return ValueRange.of(1, 4 if short_month else 5)
        if field == ChronoField.YEAR_OF_ERA:
            return ValueRange.of(1, YEAR_MAX + 1) if self._year <= 0 else ValueRange.of(1, YEAR_MAX)
        return field.range

    def get(self, field: ChronoField) -> int:
        """Get the value of a field that always fits in an int.

        Raises:
            UnsupportedFieldError: If the field is not supported, or is EPOCH_DAY or PROLEPTIC_MONTH (use
                :meth:`get_long` for those).
        """
        if field in (ChronoField.EPOCH_DAY, ChronoField.PROLEPTIC_MONTH):
            raise UnsupportedFieldError(f"Invalid field '{field}' for get() method, use get_long() instead")
        return self.get_long(field)

    def get_long(self, field: ChronoField) -> int:
        """Get the value of a field.

        Args:
            field: A date field.

        Returns:
            The field value

        Raises:
            UnsupportedFieldError: If the field is not a date field.
        """
        if field == ChronoField.DAY_OF_WEEK:
            return self.day_of_week.value
        if field == ChronoField.ALIGNED_DAY_OF_WEEK_IN_MONTH:
            return (self._day - 1) % 7 + 1
        if field == ChronoField.ALIGNED_DAY_OF_WEEK_IN_YEAR:
            return (self.day_of_year - 1) % 7 + 1
        if field == ChronoField.DAY_OF_MONTH:
            return self._day
        if field == ChronoField.DAY_OF_YEAR:
            return self.day_of_year
        if field == ChronoField.EPOCH_DAY:
            return self.to_epoch_day()
        if field == ChronoField.ALIGNED_WEEK_OF_MONTH:
            return (self._day - 1) // 7 + 1
        if field == ChronoField.ALIGNED_WEEK_OF_YEAR:
            return (self.day_of_year - 1) // 7 + 1
        if field == ChronoField.MONTH_OF_YEAR:
            return self._month
        if field == ChronoField.PROLEPTIC_MONTH:
            return self._proleptic_month()
        if field == ChronoField.YEAR_OF_ERA:
            return self._year if self._year >= 1 else 1 - self._year
        if field == ChronoField.YEAR:
            return self._year
        if field == ChronoField.ERA:
            return 1 if self._year >= 1 else 0
        raise UnsupportedFieldError(f"Unsupported field: {field}")

    def with_field(self, field: ChronoField, new_value: int) -> "LocalDate":
        """Return a copy of this date with a field changed.

        Day-of-week and aligned fields move the date by whole days or weeks. The month, year, proleptic month and
        year-of-era fields keep the day-of-month, clamping it to the end of the month if needed. Day-of-month and
        day-of-year are set exactly and raise if the result is invalid. Setting the era to a different era mirrors
        the year around year 1.

        Args:
            field: A date field.
            new_value: The new value of the field.

        Returns:
            A LocalDate object

        Raises:
            UnsupportedFieldError: If the field is not a date field.
            FieldRangeError: If the value is out of range for the field.
            InvalidDateError: If setting the day-of-month or day-of-year produces an invalid date.
        """
        if field not in DATE_FIELDS:
            raise UnsupportedFieldError(f"Unsupported field: {field}")
        field.check_valid_value(new_value)
        if field == ChronoField.DAY_OF_WEEK:
            return self.plus_days(new_value - self.day_of_week.value)
        if field == ChronoField.ALIGNED_DAY_OF_WEEK_IN_MONTH:
            return self.plus_days(new_value - self.get_long(ChronoField.ALIGNED_DAY_OF_WEEK_IN_MONTH))
        if field == ChronoField.ALIGNED_DAY_OF_WEEK_IN_YEAR:
            return self.plus_days(new_value - self.get_long(ChronoField.ALIGNED_DAY_OF_WEEK_IN_YEAR))
        if field == ChronoField.DAY_OF_MONTH:
            return self.with_day_of_month(new_value)
        if field == ChronoField.DAY_OF_YEAR:
            return self.with_day_of_year(new_value)
        if field == ChronoField.EPOCH_DAY:
            return LocalDate.of_epoch_day(new_value)
        if field == ChronoField.ALIGNED_WEEK_OF_MONTH:
            return self.plus_weeks(new_value - self.get_long(ChronoField.ALIGNED_WEEK_OF_MONTH))
        if field == ChronoField.ALIGNED_WEEK_OF_YEAR:
            return self.plus_weeks(new_value - self.get_long(ChronoField.ALIGNED_WEEK_OF_YEAR))
        if field == ChronoField.MONTH_OF_YEAR:
            return self.with_month(new_value)
        if field == ChronoField.PROLEPTIC_MONTH:
            return self.plus_months(new_value - self._proleptic_month())
        if field == ChronoField.YEAR_OF_ERA:
            return self.with_year(new_value if self._year >= 1 else 1 - new_value)
        if field == ChronoField.YEAR:
            return self.with_year(new_value)
        # ERA
        return self if self.get_long(ChronoField.ERA) == new_value else self.with_year(1 - self._year)

    def with_adjuster(self, adjuster: Any) -> "LocalDate":
        """Return an adjusted copy of this date, such as the last day of the month.

        Args:
            adjuster: Any object with an ``adjust_into`` method, see :mod:`iso_calendar.adjusters`.

        Returns:
            The adjusted date
        """
        return adjuster.adjust_into(self)

    def with_year(self, year: int) -> "LocalDate":
        """Return a copy with the year changed, clamping February 29th to the 28th if needed."""
        if self._year == year:
            return self
        ChronoField.YEAR.check_valid_value(year)
        return LocalDate._resolve_previous_valid(year, self._month, self._day)

    def with_month(self, month: int) -> "LocalDate":
        """Return a copy with the month changed, clamping the day to the end of the month if needed."""
        if self._month == month:
            return self
        ChronoField.MONTH_OF_YEAR.check_valid_value(month)
        return LocalDate._resolve_previous_valid(self._year, month, self._day)

    def with_day_of_month(self, day_of_month: int) -> "LocalDate":
        """Return a copy with the day-of-month changed.

        Raises:
            FieldRangeError: If the day is not from 1 to 31.
            InvalidDateError: If the day does not exist in this month.
        """
        if self._day == day_of_month:
            return self
        return LocalDate.of(self._year, self._month, day_of_month)

    def with_day_of_year(self, day_of_year: int) -> "LocalDate":
        if self.day_of_year == day_of_year:
            return self
        return LocalDate.of_year_day(self._year, day_of_year)

    def adjust_into(self, temporal: Any) -> Any:
        """Set the date of another temporal object to this date."""
        return temporal.with_field(ChronoField.EPOCH_DAY, self.to_epoch_day())

    # --------------------------------------------------------------------------
    # Arithmetic
    # --------------------------------------------------------------------------
    def plus(self, amount: Any, unit: ChronoUnit | None = None) -> "LocalDate":
        """Return a copy of this date with an amount added.

        Args:
            amount: The number of units to add, or an amount object (such as a Period) when no unit is given.
            unit: A date-based unit, from DAYS to ERAS.

        Returns:
            A LocalDate object

        Raises:
            UnsupportedUnitError: If the unit is not date-based.
            ArithmeticOverflowError: If the calculation overflows.
            FieldRangeError: If the result is outside the supported date range.
        """
        if unit is None:
            return amount.add_to(self)
        if unit == ChronoUnit.DAYS:
            return self.plus_days(amount)
        if unit == ChronoUnit.WEEKS:
            return self.plus_weeks(amount)
        if unit == ChronoUnit.MONTHS:
            return self.plus_months(amount)
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

    def minus(self, amount: Any, unit: ChronoUnit | None = None) -> "LocalDate":
        if unit is None:
            return amount.subtract_from(self)
        return self.plus(-amount, unit)

    def plus_years(self, years_to_add: int) -> "LocalDate":
        """Return a copy with years added, clamping February 29th to the 28th in non-leap years."""
        if years_to_add == 0:
            return self
        new_year = ChronoField.YEAR.check_valid_int_value(self._year + years_to_add)
        return LocalDate._resolve_previous_valid(new_year, self._month, self._day)

    def plus_months(self, months_to_add: int) -> "LocalDate":
        """Return a copy with months added, clamping the day to the end of the resulting month if needed.

        Args:
            months_to_add: The months to add, may be negative.

        Returns:
            A LocalDate object

        Raises:
            FieldRangeError: If the result is outside the supported date range.
        """
        if months_to_add == 0:
            return self
        calc_months = self._proleptic_month() + months_to_add
        new_year = ChronoField.YEAR.check_valid_int_value(calc_months // 12)
        new_month = calc_months % 12 + 1
        return LocalDate._resolve_previous_valid(new_year, new_month, self._day)

    def plus_weeks(self, weeks_to_add: int) -> "LocalDate":
        return self.plus_days(multiply_exact(weeks_to_add, 7))

    def plus_days(self, days_to_add: int) -> "LocalDate":
        """Return a copy with days added.

        Args:
            days_to_add: The days to add, may be negative.

        Returns:
            A LocalDate object

        Raises:
            ArithmeticOverflowError: If the epoch day calculation overflows.
            FieldRangeError: If the result is outside the supported date range.
        """
        if days_to_add == 0:
            return self
        dom = self._day + days_to_add
        if dom > 0:
            if dom <= 28:
                return LocalDate(self._year, self._month, dom)
            if dom <= 59:
                month_len = self.length_of_month()
                if dom <= month_len:
                    return LocalDate(self._year, self._month, dom)
                if self._month < 12:
                    return LocalDate(self._year, self._month + 1, dom - month_len)
                ChronoField.YEAR.check_valid_value(self._year + 1)
                return LocalDate(self._year + 1, 1, dom - month_len)
        return LocalDate.of_epoch_day(add_exact(self.to_epoch_day(), days_to_add))

    def minus_years(self, years_to_subtract: int) -> "LocalDate":
        return self.plus_years(-years_to_subtract)

    def minus_months(self, months_to_subtract: int) -> "LocalDate":
        return self.plus_months(-months_to_subtract)

    def minus_weeks(self, weeks_to_subtract: int) -> "LocalDate":
        return self.plus_weeks(-weeks_to_subtract)

    def minus_days(self, days_to_subtract: int) -> "LocalDate":
        return self.plus_days(-days_to_subtract)

    # --------------------------------------------------------------------------
    # Differences
    # --------------------------------------------------------------------------
    def until(self, end_date_exclusive: Any) -> Period:
        """Calculate the period between this date and another date.

        The result has the years, months and days all of the same sign (or zero). The month count is reduced by
        one if the end day-of-month is before the start day-of-month, and the days are then counted from the
        start date plus the months.

        Args:
            end_date_exclusive: The end date.

        Returns:
            The Period from this date to the end date.

        Raises:
            ArithmeticOverflowError: If the number of years does not fit in an int.
        """
        end = LocalDate.from_temporal(end_date_exclusive)
        total_months = end._proleptic_month() - self._proleptic_month()
        days = end._day - self._day
        if total_months > 0 and days < 0:
            total_months -= 1
            calc_date = self.plus_months(total_months)
            days = end.to_epoch_day() - calc_date.to_epoch_day()
        elif total_months < 0 and days > 0:
            total_months += 1
            days -= end.length_of_month()
        years = trunc_div(total_months, 12)
        months = total_months - years * 12
        return Period.of(years, months, days)

    def until_unit(self, end_exclusive: Any, unit: ChronoUnit) -> int:
        """Calculate the number of complete units between this date and another date.

        Args:
            end_exclusive: The end date.
            unit: A date-based unit, from DAYS to ERAS.

        Returns:
            The number of complete units, negative if the end is before this date.

        Raises:
            UnsupportedUnitError: If the unit is not date-based.
        """
        end = LocalDate.from_temporal(end_exclusive)
        if unit == ChronoUnit.DAYS:
            return self._days_until(end)
        if unit == ChronoUnit.WEEKS:
            return trunc_div(self._days_until(end), 7)
        if unit == ChronoUnit.MONTHS:
            return self._months_until(end)
        if unit == ChronoUnit.YEARS:
            return trunc_div(self._months_until(end), 12)
        if unit == ChronoUnit.DECADES:
            return trunc_div(self._months_until(end), 120)
        if unit == ChronoUnit.CENTURIES:
            return trunc_div(self._months_until(end), 1_200)
        if unit == ChronoUnit.MILLENNIA:
            return trunc_div(self._months_until(end), 12_000)
        if unit == ChronoUnit.ERAS:
            return end.get_long(ChronoField.ERA) - self.get_long(ChronoField.ERA)
        raise UnsupportedUnitError(f"Unsupported unit: {unit}")

    def _days_until(self, end: "LocalDate") -> int:
        return end.to_epoch_day() - self.to_epoch_day()

    def _months_until(self, end: "LocalDate") -> int:
        # Pack month and day into one number so a partial final month is not counted
        packed1 = self._proleptic_month() * 32 + self._day
        packed2 = end._proleptic_month() * 32 + end._day
        return trunc_div(packed2 - packed1, 32)

    def dates_until(self, end_exclusive: "LocalDate", step: Period | None = None) -> "DateSequence":
        """Return the sequence of dates from this date (inclusive) to the end date (exclusive).

        With no step the sequence advances one day at a time. With a step, the n-th element is this date plus
        ``n`` times the step, with the months added before the days, so month-end clamping is applied relative to
        this date rather than accumulated.

        Args:
            end_exclusive: The end date.
            step: The Period between consecutive dates, all components of the same sign.

        Returns:
            A re-iterable DateSequence.

        Raises:
            ValueError: If the end is before this date (no step), the step is zero, the step mixes signs, or the
                step points away from the end date.
        """
        end = end_exclusive.to_epoch_day()
        start = self.to_epoch_day()
        if step is None:
            if end < start:
                raise ValueError(f"{end_exclusive} < {self}")
            return DateSequence(end - start, lambda n: LocalDate.of_epoch_day(start + n))

        until = end - start
        months = step.to_total_months()
        days = step.days
        if months == 0 and days == 0:
            raise ValueError("step is zero")
        if (months < 0 < days) or (months > 0 > days):
            raise ValueError("period months and days are of opposite sign")
        if until == 0:
            return DateSequence(0, LocalDate.of_epoch_day)
        sign = 1 if (months > 0 or days > 0) else -1
        if (sign < 0) != (until < 0):
            raise ValueError(f"{end_exclusive} {'<' if sign > 0 else '>'} {self} (step is {step})")

        if months == 0:
            steps = (until - sign) // days
            return DateSequence(steps + 1, lambda n: LocalDate.of_epoch_day(start + n * days))

        # Estimate the number of steps using an average month length of 48699 / 1600 days
        steps = until * 1_600 // (months * 48_699 + days * 1_600) + 1
        add_months = months * steps
        add_days = days * steps
        if months > 0:
            max_add_months = LocalDate.MAX._proleptic_month() - self._proleptic_month()
        else:
            max_add_months = self._proleptic_month() - LocalDate.MIN._proleptic_month()
        if add_months * sign > max_add_months or (
            self.plus_months(add_months).to_epoch_day() + add_days
        ) * sign >= end * sign:
            steps -= 1
            add_months -= months
            add_days -= days
            if add_months * sign > max_add_months or (
                self.plus_months(add_months).to_epoch_day() + add_days
            ) * sign >= end * sign:
                steps -= 1
        return DateSequence(steps + 1, lambda n: self.plus_months(months * n).plus_days(days * n))

    # --------------------------------------------------------------------------
    # Comparison
    # --------------------------------------------------------------------------
    def _key(self) -> tuple[int, int, int]:
        return self._year, self._month, self._day

    def compare_to(self, other: "LocalDate") -> int:
        """Compare by year, then month, then day.

        Returns:
            A negative number, zero or a positive number as this date is before, equal to or after the other.
        """
        cmp = self._year - other._year
        if cmp == 0:
            cmp = self._month - other._month
            if cmp == 0:
                cmp = self._day - other._day
        return cmp

    def is_after(self, other: "LocalDate") -> bool:
        return self.compare_to(other) > 0

    def is_before(self, other: "LocalDate") -> bool:
        return self.compare_to(other) < 0

    def is_equal(self, other: "LocalDate") -> bool:
        return self.compare_to(other) == 0

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, LocalDate):
            return self._key() == other._key()
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._key() >= other._key()

    def __add__(self, other: Any) -> "LocalDate":
        if isinstance(other, Period):
            return self.plus(other)
        return NotImplemented

    def __sub__(self, other: Any) -> "LocalDate":
        if isinstance(other, Period):
            return self.minus(other)
        return NotImplemented

    def __str__(self) -> str:
        return f"{format_year(self._year)}-{self._month:02}-{self._day:02}"

    def __repr__(self) -> str:
        return f"LocalDate('{self}')"


class DateSequence(Sequence[LocalDate]):
    """A lazy, finite sequence of dates produced by :meth:`LocalDate.dates_until`.

    Dates are computed on demand from their index, so the sequence can be iterated any number of times and indexed
    directly without materialising it.
    """

    def __init__(self, count: int, nth: Callable[[int], LocalDate]) -> None:
        self._count = count
        self._nth = nth

    def __len__(self) -> int:
        return self._count

    @overload
    def __getitem__(self, index: int) -> LocalDate: ...

    @overload
    def __getitem__(self, index: slice) -> list[LocalDate]: ...

    def __getitem__(self, index: int | slice) -> LocalDate | list[LocalDate]:
        if isinstance(index, slice):
            return [self._nth(i) for i in range(self._count)[index]]
        if index < 0:
            index += self._count
        if not 0 <= index < self._count:
            raise IndexError("DateSequence index out of range")
        return self._nth(index)

    def __iter__(self) -> Iterator[LocalDate]:
        for i in range(self._count):
            yield self._nth(i)

    def __repr__(self) -> str:
        if self._count == 0:
            return "DateSequence([])"
        return f"DateSequence({self[0]} .. {self[-1]}, count={self._count})"


LocalDate.MIN = LocalDate(YEAR_MIN, 1, 1)
LocalDate.MAX = LocalDate(YEAR_MAX, 12, 31)
LocalDate.EPOCH = LocalDate(1970, 1, 1)
