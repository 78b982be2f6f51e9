"""
Temporal fields and their value ranges.

A field is a single named component of a date or time, such as the month-of-year or the hour-of-day. The set of
fields is closed: every temporal type declares the subset it supports, and the generic ``get`` / ``with_field``
protocol dispatches on the members of :class:`ChronoField`.
"""

from dataclasses import dataclass
from enum import Enum

from iso_calendar.enums import ChronoUnit
from iso_calendar.exceptions import FieldRangeError

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1

YEAR_MIN = -999_999_999
YEAR_MAX = 999_999_999


@dataclass(eq=True, frozen=True)
class ValueRange:
    """The range of valid values for a field.

    The minimum is fixed, while the maximum may vary between ``max_smallest`` and ``max_largest`` depending on
    context. For example, the day-of-month runs from 1 to between 28 and 31.
    """

    minimum: int
    max_smallest: int
    max_largest: int

    @staticmethod
    def of(minimum: int, maximum: int, max_largest: int | None = None) -> "ValueRange":
        """Create a range.

        Args:
            minimum: The minimum value.
            maximum: The maximum value, or the smallest maximum when ``max_largest`` is given.
            max_largest: The largest maximum, when the maximum varies.

        Returns:
            A ValueRange object
        """
        if max_largest is None:
            max_largest = maximum
        return ValueRange(minimum, maximum, max_largest)

    def __post_init__(self) -> None:
        if self.minimum > self.max_smallest or self.max_smallest > self.max_largest:
            raise ValueError(f"Illegal value range: {self.minimum} - {self.max_smallest}/{self.max_largest}")

    @property
    def maximum(self) -> int:
        return self.max_largest

    def is_fixed(self) -> bool:
        return self.max_smallest == self.max_largest

    def is_int_value(self) -> bool:
        """Whether every value in the range fits in a signed 32-bit int."""
        return self.minimum >= INT_MIN and self.max_largest <= INT_MAX

    def is_valid_value(self, value: int) -> bool:
        return self.minimum <= value <= self.max_largest

    def is_valid_int_value(self, value: int) -> bool:
        return self.is_int_value() and self.is_valid_value(value)

    def check_valid_value(self, value: int, field: "ChronoField | None" = None) -> int:
        """Check that a value lies in this range.

        Args:
            value: The value to check.
            field: The field being checked, used in the error message.

        Returns:
            The value, unchanged.

        Raises:
            FieldRangeError: If the value is out of range.
        """
        if not self.is_valid_value(value):
            raise FieldRangeError(self._error_message(value, field))
        return value

    def check_valid_int_value(self, value: int, field: "ChronoField | None" = None) -> int:
        if not self.is_valid_int_value(value):
            raise FieldRangeError(self._error_message(value, field))
        return value

    def _error_message(self, value: int, field: "ChronoField | None") -> str:
        if field is not None:
            return f"Invalid value for {field.display_name} (valid values {self}): {value}"
        return f"Invalid value (valid values {self}): {value}"

    def __str__(self) -> str:
        if self.is_fixed():
            return f"{self.minimum} - {self.max_largest}"
        return f"{self.minimum} - {self.max_smallest}/{self.max_largest}"


class ChronoField(Enum):
    """Enum representing the standard set of date and time fields.

    The value of each member is its display name. The base unit, range unit and value range of each field are
    available as properties.
    """

    NANO_OF_SECOND = "NanoOfSecond"
    NANO_OF_DAY = "NanoOfDay"
    MICRO_OF_SECOND = "MicroOfSecond"
    MICRO_OF_DAY = "MicroOfDay"
    MILLI_OF_SECOND = "MilliOfSecond"
    MILLI_OF_DAY = "MilliOfDay"
    SECOND_OF_MINUTE = "SecondOfMinute"
    SECOND_OF_DAY = "SecondOfDay"
    MINUTE_OF_HOUR = "MinuteOfHour"
    MINUTE_OF_DAY = "MinuteOfDay"
    HOUR_OF_AMPM = "HourOfAmPm"
    CLOCK_HOUR_OF_AMPM = "ClockHourOfAmPm"
    HOUR_OF_DAY = "HourOfDay"
    CLOCK_HOUR_OF_DAY = "ClockHourOfDay"
    AMPM_OF_DAY = "AmPmOfDay"
    DAY_OF_WEEK = "DayOfWeek"
    ALIGNED_DAY_OF_WEEK_IN_MONTH = "AlignedDayOfWeekInMonth"
    ALIGNED_DAY_OF_WEEK_IN_YEAR = "AlignedDayOfWeekInYear"
    DAY_OF_MONTH = "DayOfMonth"
    DAY_OF_YEAR = "DayOfYear"
    EPOCH_DAY = "EpochDay"
    ALIGNED_WEEK_OF_MONTH = "AlignedWeekOfMonth"
    ALIGNED_WEEK_OF_YEAR = "AlignedWeekOfYear"
    MONTH_OF_YEAR = "MonthOfYear"
    PROLEPTIC_MONTH = "ProlepticMonth"
    YEAR_OF_ERA = "YearOfEra"
    YEAR = "Year"
    ERA = "Era"
    INSTANT_SECONDS = "InstantSeconds"
    OFFSET_SECONDS = "OffsetSeconds"

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def base_unit(self) -> ChronoUnit:
        return _FIELD_DEFINITIONS[self][0]

    @property
    def range_unit(self) -> ChronoUnit:
        return _FIELD_DEFINITIONS[self][1]

    @property
    def range(self) -> ValueRange:
        """The outer range of valid values for the field, independent of any particular date or time."""
        return _FIELD_DEFINITIONS[self][2]

    @property
    def is_date_based(self) -> bool:
        return self.base_unit.is_date_based and self is not ChronoField.INSTANT_SECONDS

    @property
    def is_time_based(self) -> bool:
        return self.base_unit.is_time_based and self not in (ChronoField.INSTANT_SECONDS, ChronoField.OFFSET_SECONDS)

    def check_valid_value(self, value: int) -> int:
        return self.range.check_valid_value(value, self)

    def check_valid_int_value(self, value: int) -> int:
        return self.range.check_valid_int_value(value, self)

    def __str__(self) -> str:
        return self.display_name


_FIELD_DEFINITIONS: dict[ChronoField, tuple[ChronoUnit, ChronoUnit, ValueRange]] = {
    ChronoField.NANO_OF_SECOND: (ChronoUnit.NANOS, ChronoUnit.SECONDS, ValueRange.of(0, 999_999_999)),
    ChronoField.NANO_OF_DAY: (ChronoUnit.NANOS, ChronoUnit.DAYS, ValueRange.of(0, 86_400 * 1_000_000_000 - 1)),
    ChronoField.MICRO_OF_SECOND: (ChronoUnit.MICROS, ChronoUnit.SECONDS, ValueRange.of(0, 999_999)),
    ChronoField.MICRO_OF_DAY: (ChronoUnit.MICROS, ChronoUnit.DAYS, ValueRange.of(0, 86_400 * 1_000_000 - 1)),
    ChronoField.MILLI_OF_SECOND: (ChronoUnit.MILLIS, ChronoUnit.SECONDS, ValueRange.of(0, 999)),
    ChronoField.MILLI_OF_DAY: (ChronoUnit.MILLIS, ChronoUnit.DAYS, ValueRange.of(0, 86_400 * 1_000 - 1)),
    ChronoField.SECOND_OF_MINUTE: (ChronoUnit.SECONDS, ChronoUnit.MINUTES, ValueRange.of(0, 59)),
    ChronoField.SECOND_OF_DAY: (ChronoUnit.SECONDS, ChronoUnit.DAYS, ValueRange.of(0, 86_400 - 1)),
    ChronoField.MINUTE_OF_HOUR: (ChronoUnit.MINUTES, ChronoUnit.HOURS, ValueRange.of(0, 59)),
    ChronoField.MINUTE_OF_DAY: (ChronoUnit.MINUTES, ChronoUnit.DAYS, ValueRange.of(0, 24 * 60 - 1)),
    ChronoField.HOUR_OF_AMPM: (ChronoUnit.HOURS, ChronoUnit.HALF_DAYS, ValueRange.of(0, 11)),
    ChronoField.CLOCK_HOUR_OF_AMPM: (ChronoUnit.HOURS, ChronoUnit.HALF_DAYS, ValueRange.of(1, 12)),
    ChronoField.HOUR_OF_DAY: (ChronoUnit.HOURS, ChronoUnit.DAYS, ValueRange.of(0, 23)),
    ChronoField.CLOCK_HOUR_OF_DAY: (ChronoUnit.HOURS, ChronoUnit.DAYS, ValueRange.of(1, 24)),
    ChronoField.AMPM_OF_DAY: (ChronoUnit.HALF_DAYS, ChronoUnit.DAYS, ValueRange.of(0, 1)),
    ChronoField.DAY_OF_WEEK: (ChronoUnit.DAYS, ChronoUnit.WEEKS, ValueRange.of(1, 7)),
    ChronoField.ALIGNED_DAY_OF_WEEK_IN_MONTH: (ChronoUnit.DAYS, ChronoUnit.WEEKS, ValueRange.of(1, 7)),
    ChronoField.ALIGNED_DAY_OF_WEEK_IN_YEAR: (ChronoUnit.DAYS, ChronoUnit.WEEKS, ValueRange.of(1, 7)),
    ChronoField.DAY_OF_MONTH: (ChronoUnit.DAYS, ChronoUnit.MONTHS, ValueRange.of(1, 28, 31)),
    ChronoField.DAY_OF_YEAR: (ChronoUnit.DAYS, ChronoUnit.YEARS, ValueRange.of(1, 365, 366)),
    ChronoField.EPOCH_DAY: (ChronoUnit.DAYS, ChronoUnit.FOREVER, ValueRange.of(-365_243_219_162, 365_241_780_471)),
    ChronoField.ALIGNED_WEEK_OF_MONTH: (ChronoUnit.WEEKS, ChronoUnit.MONTHS, ValueRange.of(1, 4, 5)),
    ChronoField.ALIGNED_WEEK_OF_YEAR: (ChronoUnit.WEEKS, ChronoUnit.YEARS, ValueRange.of(1, 53)),
    ChronoField.MONTH_OF_YEAR: (ChronoUnit.MONTHS, ChronoUnit.YEARS, ValueRange.of(1, 12)),
    ChronoField.PROLEPTIC_MONTH: (
        ChronoUnit.MONTHS,
        ChronoUnit.FOREVER,
        ValueRange.of(YEAR_MIN * 12, YEAR_MAX * 12 + 11),
    ),
    ChronoField.YEAR_OF_ERA: (ChronoUnit.YEARS, ChronoUnit.FOREVER, ValueRange.of(1, YEAR_MAX, YEAR_MAX + 1)),
    ChronoField.YEAR: (ChronoUnit.YEARS, ChronoUnit.FOREVER, ValueRange.of(YEAR_MIN, YEAR_MAX)),
    ChronoField.ERA: (ChronoUnit.ERAS, ChronoUnit.FOREVER, ValueRange.of(0, 1)),
    ChronoField.INSTANT_SECONDS: (ChronoUnit.SECONDS, ChronoUnit.FOREVER, ValueRange.of(LONG_MIN, LONG_MAX)),
    ChronoField.OFFSET_SECONDS: (ChronoUnit.SECONDS, ChronoUnit.FOREVER, ValueRange.of(-18 * 3_600, 18 * 3_600)),
}
