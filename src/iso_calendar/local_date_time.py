"""
LocalDateTime: a date-time without an offset, such as ``2024-02-29T10:15:30``.

A LocalDateTime is the combination of a :class:`LocalDate` and a :class:`LocalTime`. Time arithmetic carries any
overflow past midnight into the date.
"""

import re
from typing import TYPE_CHECKING, Any

from iso_calendar.enums import NANOS_PER_SECOND, SECONDS_PER_DAY, ChronoUnit, DayOfWeek
from iso_calendar.exceptions import UnsupportedFieldError
from iso_calendar.fields import ChronoField, ValueRange
from iso_calendar.instant import Instant
from iso_calendar.local_date import LocalDate, match_date
from iso_calendar.local_time import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MINUTE,
    TIME_FIELDS,
    LocalTime,
    match_time,
)
from iso_calendar.parsing import DATE_TIME_PARTS, TextPattern
from iso_calendar.period import Period
from iso_calendar.utils import add_exact, multiply_exact, trunc_div
from iso_calendar.zone_offset import ZoneOffset

if TYPE_CHECKING:
    from iso_calendar.offset_date_time import OffsetDateTime

_DATE_TIME_PATTERN = TextPattern("a LocalDateTime", DATE_TIME_PARTS)


def match_date_time(text: str, matcher: re.Match) -> "LocalDateTime":
    """Build a LocalDateTime from a match of a date-time pattern.

    The expression must define the groups year, month, day, hour, minute, second and fraction.

    Raises:
        DateTimeParseError: If the matched values do not form a valid date-time.
    """
    return LocalDateTime(match_date(text, matcher), match_time(text, matcher))


class LocalDateTime:
    """A date-time without an offset in the proleptic ISO calendar, such as ``2024-02-29T10:15:30``.

    LocalDateTime instances are immutable, hashable and sortable.
    """

    __slots__ = ("_date", "_time")

    MIN: "LocalDateTime"
    MAX: "LocalDateTime"

    def __init__(self, date: LocalDate, time: LocalTime) -> None:
        self._date = date
        self._time = time

    @staticmethod
    def of(date: LocalDate, time: LocalTime) -> "LocalDateTime":
        return LocalDateTime(date, time)

    @staticmethod
    def of_fields(
        year: int,
        month: int,
        day_of_month: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nano_of_second: int = 0,
    ) -> "LocalDateTime":
        """Return a LocalDateTime from the individual date and time fields.

        Raises:
            FieldRangeError: If any value is out of range.
            InvalidDateError: If the day-of-month is invalid for the month-year.
        """
        return LocalDateTime(
            LocalDate.of(year, month, day_of_month),
            LocalTime.of(hour, minute, second, nano_of_second),
        )

    @staticmethod
    def of_epoch_second(epoch_second: int, nano_of_second: int, offset: ZoneOffset) -> "LocalDateTime":
        """Return the LocalDateTime of an epoch second as seen at the given offset.

        Args:
            epoch_second: The seconds since 1970-01-01T00:00:00Z.
            nano_of_second: The nanosecond within the second, from 0 to 999,999,999.
            offset: The offset to view the instant at.

        Returns:
            A LocalDateTime object

        Raises:
            FieldRangeError: If the result is outside the supported date range.
        """
        ChronoField.NANO_OF_SECOND.check_valid_value(nano_of_second)
        local_second = epoch_second + offset.total_seconds
        local_epoch_day, secs_of_day = divmod(local_second, SECONDS_PER_DAY)
        date = LocalDate.of_epoch_day(local_epoch_day)
        time = LocalTime.of_nano_of_day(secs_of_day * NANOS_PER_SECOND + nano_of_second)
        return LocalDateTime(date, time)

    @staticmethod
    def of_instant(instant: Instant, offset: ZoneOffset) -> "LocalDateTime":
        return LocalDateTime.of_epoch_second(instant.epoch_second, instant.nano, offset)

    @staticmethod
    def from_temporal(temporal: Any) -> "LocalDateTime":
        if isinstance(temporal, LocalDateTime):
            return temporal
        to_local_date_time = getattr(temporal, "to_local_date_time", None)
        if to_local_date_time is None:
            raise UnsupportedFieldError(
                f"Unable to obtain LocalDateTime from {type(temporal).__name__}: {temporal!r}"
            )
        return to_local_date_time()

    @staticmethod
    def parse(text: str) -> "LocalDateTime":
        """Return a LocalDateTime from ISO text such as ``2007-12-03T10:15:30``.

        Raises:
            DateTimeParseError: If the text cannot be parsed.
        """
        return match_date_time(text, _DATE_TIME_PATTERN.match(text))

    # --------------------------------------------------------------------------
    # Accessors
    # --------------------------------------------------------------------------
    @property
    def date(self) -> LocalDate:
        return self._date

    @property
    def time(self) -> LocalTime:
        return self._time

    def to_local_date(self) -> LocalDate:
        return self._date

    def to_local_time(self) -> LocalTime:
        return self._time

    @property
    def year(self) -> int:
        return self._date.year

    @property
    def month(self) -> int:
        return self._date.month

    @property
    def day(self) -> int:
        return self._date.day

    @property
    def day_of_year(self) -> int:
        return self._date.day_of_year

    @property
    def day_of_week(self) -> DayOfWeek:
        return self._date.day_of_week

    @property
    def hour(self) -> int:
        return self._time.hour

    @property
    def minute(self) -> int:
        return self._time.minute

    @property
    def second(self) -> int:
        return self._time.second

    @property
    def nano(self) -> int:
        return self._time.nano

    def to_epoch_second(self, offset: ZoneOffset) -> int:
        """The seconds since 1970-01-01T00:00:00Z for this date-time at the given offset."""
        return self._date.to_epoch_day() * SECONDS_PER_DAY + self._time.to_second_of_day() - offset.total_seconds

    def to_instant(self, offset: ZoneOffset) -> Instant:
        return Instant.of_epoch_second(self.to_epoch_second(offset), self._time.nano)

    def at_offset(self, offset: ZoneOffset) -> "OffsetDateTime":
        from iso_calendar.offset_date_time import OffsetDateTime  # noqa: PLC0415

        return OffsetDateTime.of_local(self, offset)

    # --------------------------------------------------------------------------
    # Field protocol
    # --------------------------------------------------------------------------
    def is_supported(self, field_or_unit: ChronoField | ChronoUnit) -> bool:
        if isinstance(field_or_unit, ChronoUnit):
            return field_or_unit != ChronoUnit.FOREVER
        return field_or_unit in TIME_FIELDS or self._date.is_supported(field_or_unit)

    def range(self, field: ChronoField) -> ValueRange:
        if field in TIME_FIELDS:
            return self._time.range(field)
        return self._date.range(field)

    def get(self, field: ChronoField) -> int:
        if field in TIME_FIELDS:
            return self._time.get(field)
        return self._date.get(field)

    def get_long(self, field: ChronoField) -> int:
        if field in TIME_FIELDS:
            return self._time.get_long(field)
        return self._date.get_long(field)

    def with_field(self, field: ChronoField, new_value: int) -> "LocalDateTime":
        """Return a copy with a date or time field changed, as by :meth:`LocalDate.with_field` or
        :meth:`LocalTime.with_field`.
        """
        if field in TIME_FIELDS:
            return self._with(self._date, self._time.with_field(field, new_value))
        return self._with(self._date.with_field(field, new_value), self._time)

    def with_adjuster(self, adjuster: Any) -> "LocalDateTime":
        if isinstance(adjuster, LocalDate):
            return self._with(adjuster, self._time)
        if isinstance(adjuster, LocalTime):
            return self._with(self._date, adjuster)
        return adjuster.adjust_into(self)

    def _with(self, new_date: LocalDate, new_time: LocalTime) -> "LocalDateTime":
        if self._date is new_date and self._time is new_time:
            return self
        return LocalDateTime(new_date, new_time)

    def with_year(self, year: int) -> "LocalDateTime":
        return self._with(self._date.with_year(year), self._time)

    def with_month(self, month: int) -> "LocalDateTime":
        return self._with(self._date.with_month(month), self._time)

    def with_day_of_month(self, day_of_month: int) -> "LocalDateTime":
        return self._with(self._date.with_day_of_month(day_of_month), self._time)

    def with_day_of_year(self, day_of_year: int) -> "LocalDateTime":
        return self._with(self._date.with_day_of_year(day_of_year), self._time)

    def with_hour(self, hour: int) -> "LocalDateTime":
        return self._with(self._date, self._time.with_hour(hour))

    def with_minute(self, minute: int) -> "LocalDateTime":
        return self._with(self._date, self._time.with_minute(minute))

    def with_second(self, second: int) -> "LocalDateTime":
        return self._with(self._date, self._time.with_second(second))

    def with_nano(self, nano_of_second: int) -> "LocalDateTime":
        return self._with(self._date, self._time.with_nano(nano_of_second))

    def truncated_to(self, unit: ChronoUnit) -> "LocalDateTime":
        return self._with(self._date, self._time.truncated_to(unit))

    # --------------------------------------------------------------------------
    # Arithmetic
    # --------------------------------------------------------------------------
    def plus(self, amount: Any, unit: ChronoUnit | None = None) -> "LocalDateTime":
        """Return a copy of this date-time with an amount added.

        Time-based units carry into the date; date-based units are added to the date as by :meth:`LocalDate.plus`.

        Args:
            amount: The number of units to add, or an amount object (such as a Period) when no unit is given.
            unit: The unit of the amount.

        Returns:
            A LocalDateTime object

        Raises:
            UnsupportedUnitError: If the unit is not supported.
            ArithmeticOverflowError: If the calculation overflows.
        """
        if unit is None:
            return amount.add_to(self)
        if unit.is_time_based:
            if unit == ChronoUnit.NANOS:
                return self.plus_nanos(amount)
            if unit == ChronoUnit.SECONDS:
                return self.plus_seconds(amount)
            if unit == ChronoUnit.MINUTES:
                return self.plus_minutes(amount)
            if unit == ChronoUnit.HOURS:
                return self.plus_hours(amount)
            # MICROS, MILLIS and HALF_DAYS split into whole days and a remainder
            per_day = NANOS_PER_DAY // unit.duration_nanos
            days, remainder = divmod(amount, per_day)
            return self.plus_days(days).plus_nanos(remainder * unit.duration_nanos)
        return self._with(self._date.plus(amount, unit), self._time)

    def minus(self, amount: Any, unit: ChronoUnit | None = None) -> "LocalDateTime":
        if unit is None:
            return amount.subtract_from(self)
        return self.plus(-amount, unit)

    def plus_years(self, years: int) -> "LocalDateTime":
        return self._with(self._date.plus_years(years), self._time)

    def plus_months(self, months: int) -> "LocalDateTime":
        return self._with(self._date.plus_months(months), self._time)

    def plus_weeks(self, weeks: int) -> "LocalDateTime":
        return self._with(self._date.plus_weeks(weeks), self._time)

    def plus_days(self, days: int) -> "LocalDateTime":
        return self._with(self._date.plus_days(days), self._time)

    def plus_hours(self, hours: int) -> "LocalDateTime":
        return self._plus_with_overflow(hours * NANOS_PER_HOUR)

    def plus_minutes(self, minutes: int) -> "LocalDateTime":
        return self._plus_with_overflow(minutes * NANOS_PER_MINUTE)

    def plus_seconds(self, seconds: int) -> "LocalDateTime":
        return self._plus_with_overflow(seconds * NANOS_PER_SECOND)

    def plus_nanos(self, nanos: int) -> "LocalDateTime":
        return self._plus_with_overflow(nanos)

    def minus_years(self, years: int) -> "LocalDateTime":
        return self.plus_years(-years)

    def minus_months(self, months: int) -> "LocalDateTime":
        return self.plus_months(-months)

    def minus_weeks(self, weeks: int) -> "LocalDateTime":
        return self.plus_weeks(-weeks)

    def minus_days(self, days: int) -> "LocalDateTime":
        return self.plus_days(-days)

    def minus_hours(self, hours: int) -> "LocalDateTime":
        return self.plus_hours(-hours)

    def minus_minutes(self, minutes: int) -> "LocalDateTime":
        return self.plus_minutes(-minutes)

    def minus_seconds(self, seconds: int) -> "LocalDateTime":
        return self.plus_seconds(-seconds)

    def minus_nanos(self, nanos: int) -> "LocalDateTime":
        return self.plus_nanos(-nanos)

    def _plus_with_overflow(self, nanos: int) -> "LocalDateTime":
        """Add a signed number of nanoseconds, carrying whole days into the date.

        The nanoseconds are not range checked; an overflow is detected when the days are added to the date.
        """
        if nanos == 0:
            return self
        cur_nod = self._time.to_nano_of_day()
        days, new_nod = divmod(cur_nod + nanos, NANOS_PER_DAY)
        new_time = self._time if new_nod == cur_nod else LocalTime.of_nano_of_day(new_nod)
        return self._with(self._date.plus_days(days), new_time)

    def until(self, end_exclusive: Any, unit: ChronoUnit) -> int:
        """Calculate the number of complete units between this date-time and another.

        For date-based units the end date is moved back (or forward) a day when its time is before (or after)
        this time, so that only complete days are counted.

        Args:
            end_exclusive: The end date-time.
            unit: The unit to measure in.

        Returns:
            The number of complete units, negative if the end is before this date-time.

        Raises:
            UnsupportedUnitError: If the unit is not supported.
            ArithmeticOverflowError: If the result overflows a 64-bit long.
        """
        end = LocalDateTime.from_temporal(end_exclusive)
        if unit.is_time_based:
            days = self._date.until_unit(end._date, ChronoUnit.DAYS)
            if days == 0:
                return self._time.until(end._time, unit)
            time_part = end._time.to_nano_of_day() - self._time.to_nano_of_day()
            if days > 0:
                days -= 1
                time_part += NANOS_PER_DAY
            else:
                days += 1
                time_part -= NANOS_PER_DAY
            dur = unit.duration_nanos
            return add_exact(multiply_exact(days, NANOS_PER_DAY // dur), trunc_div(time_part, dur))

        end_date = end._date
        if end_date.is_after(self._date) and end._time.is_before(self._time):
            end_date = end_date.minus_days(1)
        elif end_date.is_before(self._date) and end._time.is_after(self._time):
            end_date = end_date.plus_days(1)
        return self._date.until_unit(end_date, unit)

    # --------------------------------------------------------------------------
    # Comparison
    # --------------------------------------------------------------------------
    def compare_to(self, other: "LocalDateTime") -> int:
        cmp = self._date.compare_to(other._date)
        if cmp == 0:
            cmp = self._time.compare_to(other._time)
        return cmp

    def is_after(self, other: "LocalDateTime") -> bool:
        return self.compare_to(other) > 0

    def is_before(self, other: "LocalDateTime") -> bool:
        return self.compare_to(other) < 0

    def is_equal(self, other: "LocalDateTime") -> bool:
        return self.compare_to(other) == 0

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, LocalDateTime):
            return self._date == other._date and self._time == other._time
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._date, self._time))

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __add__(self, other: Any) -> "LocalDateTime":
        if isinstance(other, Period):
            return self.plus(other)
        return NotImplemented

    def __sub__(self, other: Any) -> "LocalDateTime":
        if isinstance(other, Period):
            return self.minus(other)
        return NotImplemented

    def __str__(self) -> str:
        return f"{self._date}T{self._time}"

    def __repr__(self) -> str:
        return f"LocalDateTime('{self}')"


LocalDateTime.MIN = LocalDateTime(LocalDate.MIN, LocalTime.MIN)
LocalDateTime.MAX = LocalDateTime(LocalDate.MAX, LocalTime.MAX)
