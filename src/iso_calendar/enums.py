"""
Calendar Enumerations.

This module defines the enums used throughout iso_calendar to standardise units, days of the week, months and eras.
"""

from enum import Enum

from iso_calendar.exceptions import FieldRangeError, UnsupportedUnitError

NANOS_PER_SECOND = 1_000_000_000
SECONDS_PER_DAY = 86_400


class ChronoUnit(Enum):
    """Enum representing the standard units of time used for arithmetic and differences.

    Attributes:
        NANOS: A nanosecond.
        MICROS: A microsecond (1,000 nanoseconds).
        MILLIS: A millisecond (1,000,000 nanoseconds).
        SECONDS: A second.
        MINUTES: A minute (60 seconds).
        HOURS: An hour (3,600 seconds).
        HALF_DAYS: Twelve hours, as used in AM/PM.
        DAYS: A standard day of 24 hours.
        WEEKS: Seven days.
        MONTHS: A calendar month, of variable length.
        YEARS: A calendar year, of variable length.
        DECADES: Ten years.
        CENTURIES: One hundred years.
        MILLENNIA: One thousand years.
        ERAS: The ISO eras, BCE and CE.
        FOREVER: An artificial unit representing an unbounded amount of time.
    """

    NANOS = "nanos"
    MICROS = "micros"
    MILLIS = "millis"
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    HALF_DAYS = "half_days"
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    YEARS = "years"
    DECADES = "decades"
    CENTURIES = "centuries"
    MILLENNIA = "millennia"
    ERAS = "eras"
    FOREVER = "forever"

    @property
    def is_time_based(self) -> bool:
        """True for the units shorter than a day (NANOS up to HALF_DAYS)."""
        return self in _TIME_UNIT_NANOS and self is not ChronoUnit.DAYS

    @property
    def is_date_based(self) -> bool:
        """True for the units from DAYS up to ERAS."""
        return self in _DATE_UNITS

    @property
    def duration_nanos(self) -> int:
        """The exact length of a unit of up to a day, in nanoseconds.

        Raises:
            UnsupportedUnitError: If the unit has no fixed length (months and above).
        """
        try:
            return _TIME_UNIT_NANOS[self]
        except KeyError:
            raise UnsupportedUnitError(f"Unit has no exact duration: {self.name}") from None


_TIME_UNIT_NANOS = {
    ChronoUnit.NANOS: 1,
    ChronoUnit.MICROS: 1_000,
    ChronoUnit.MILLIS: 1_000_000,
    ChronoUnit.SECONDS: NANOS_PER_SECOND,
    ChronoUnit.MINUTES: 60 * NANOS_PER_SECOND,
    ChronoUnit.HOURS: 3_600 * NANOS_PER_SECOND,
    ChronoUnit.HALF_DAYS: 43_200 * NANOS_PER_SECOND,
    ChronoUnit.DAYS: SECONDS_PER_DAY * NANOS_PER_SECOND,
}

_DATE_UNITS = frozenset(
    [
        ChronoUnit.DAYS,
        ChronoUnit.WEEKS,
        ChronoUnit.MONTHS,
        ChronoUnit.YEARS,
        ChronoUnit.DECADES,
        ChronoUnit.CENTURIES,
        ChronoUnit.MILLENNIA,
        ChronoUnit.ERAS,
    ]
)


class DayOfWeek(Enum):
    """Enum representing the seven days of the week, numbered from Monday (1) to Sunday (7)."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @staticmethod
    def of(day_of_week: int) -> "DayOfWeek":
        """Return the day of the week for an ISO number from 1 (Monday) to 7 (Sunday).

        Args:
            day_of_week: The ISO day-of-week number.

        Returns:
            The DayOfWeek member.

        Raises:
            FieldRangeError: If the number is not from 1 to 7.
        """
        if not 1 <= day_of_week <= 7:
            raise FieldRangeError(f"Invalid value for DayOfWeek: {day_of_week}")
        return DayOfWeek(day_of_week)

    def plus(self, days: int) -> "DayOfWeek":
        """Return the day of the week that is the given number of days after this one."""
        return DayOfWeek((self.value - 1 + days) % 7 + 1)


class Month(Enum):
    """Enum representing the twelve months of the ISO calendar, numbered from January (1) to December (12)."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @staticmethod
    def of(month: int) -> "Month":
        """Return the month for a number from 1 (January) to 12 (December).

        Raises:
            FieldRangeError: If the number is not from 1 to 12.
        """
        if not 1 <= month <= 12:
            raise FieldRangeError(f"Invalid value for MonthOfYear: {month}")
        return Month(month)

    def plus(self, months: int) -> "Month":
        """Return the month that is the given number of months after this one, wrapping around the year."""
        return Month((self.value - 1 + months) % 12 + 1)

    def length(self, leap_year: bool) -> int:
        """The number of days in this month.

        Args:
            leap_year: Whether the month falls in a leap year.

        Returns:
            The length of the month in days, from 28 to 31.
        """
        if self is Month.FEBRUARY:
            return 29 if leap_year else 28
        if self in (Month.APRIL, Month.JUNE, Month.SEPTEMBER, Month.NOVEMBER):
            return 30
        return 31

    def max_length(self) -> int:
        return self.length(True)

    def first_day_of_year(self, leap_year: bool) -> int:
        """The day-of-year of the first day of this month.

        Args:
            leap_year: Whether the month falls in a leap year.

        Returns:
            The day-of-year, from 1 to 336.
        """
        leap = 1 if leap_year else 0
        if self is Month.JANUARY:
            return 1
        if self is Month.FEBRUARY:
            return 32
        return _MARCH_BASED_FIRST_DAYS[self.value - 3] + leap


# Day-of-year of the first of each month from March, in a non-leap year
_MARCH_BASED_FIRST_DAYS = (60, 91, 121, 152, 182, 213, 244, 274, 305, 335)


class IsoEra(Enum):
    """Enum representing the two ISO eras.

    Attributes:
        BCE: Before current era, proleptic years 0 and earlier.
        CE: Current era, proleptic years 1 and later.
    """

    BCE = 0
    CE = 1

    @staticmethod
    def of(era: int) -> "IsoEra":
        if era not in (0, 1):
            raise FieldRangeError(f"Invalid era: {era}")
        return IsoEra(era)
