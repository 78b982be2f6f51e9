"""
OffsetDateTime: a date-time with a fixed offset from UTC, such as ``2007-12-03T10:15:30+01:00``.

An OffsetDateTime is a :class:`LocalDateTime` combined with a :class:`ZoneOffset`, which together identify a single
instant on the time-line. There is no link to time-zone rules, so daylight saving gaps and overlaps are not
resolved here.

Two methods change the offset and are easily confused:

    odt.with_offset_same_local(o)    # keeps the local date-time, so the instant moves
    odt.with_offset_same_instant(o)  # keeps the instant, so the local date-time moves

Ordering with ``<`` and :meth:`OffsetDateTime.compare_to` is by instant first and then by local date-time, so it is
consistent with ``==``. The :meth:`OffsetDateTime.is_equal` family compares the instant only.
"""

import datetime as dt
from typing import Any

from iso_calendar.enums import ChronoUnit, DayOfWeek
from iso_calendar.exceptions import DateTimeParseError, OffsetError, UnsupportedFieldError
from iso_calendar.fields import ChronoField, ValueRange
from iso_calendar.instant import Instant
from iso_calendar.local_date import LocalDate
from iso_calendar.local_date_time import LocalDateTime, match_date_time
from iso_calendar.local_time import LocalTime
from iso_calendar.parsing import DATE_TIME_PARTS, OFFSET, TextPattern
from iso_calendar.period import Period
from iso_calendar.zone_offset import ZoneOffset

_OFFSET_DATE_TIME_PATTERN = TextPattern("an OffsetDateTime", DATE_TIME_PARTS + (OFFSET,))

_OFFSET_FIELDS = frozenset([ChronoField.INSTANT_SECONDS, ChronoField.OFFSET_SECONDS])


class OffsetDateTime:
    """A date-time with an offset from UTC in the proleptic ISO calendar, such as ``2007-12-03T10:15:30+01:00``.

    OffsetDateTime instances are immutable, hashable and sortable.
    """

    __slots__ = ("_date_time", "_offset")

    MIN: "OffsetDateTime"
    MAX: "OffsetDateTime"

    def __init__(self, date_time: LocalDateTime, offset: ZoneOffset) -> None:
        self._date_time = date_time
        self._offset = offset

    # --------------------------------------------------------------------------
    # Factories
    # --------------------------------------------------------------------------
    @staticmethod
    def of(date: LocalDate, time: LocalTime, offset: ZoneOffset) -> "OffsetDateTime":
        return OffsetDateTime(LocalDateTime.of(date, time), offset)

    @staticmethod
    def of_local(date_time: LocalDateTime, offset: ZoneOffset) -> "OffsetDateTime":
        return OffsetDateTime(date_time, offset)

    @staticmethod
    def of_fields(
        year: int,
        month: int,
        day_of_month: int,
        hour: int,
        minute: int,
        second: int,
        nano_of_second: int,
        offset: ZoneOffset,
    ) -> "OffsetDateTime":
        """Return an OffsetDateTime from the individual date and time fields and an offset.

        Raises:
            FieldRangeError: If any value is out of range.
            InvalidDateError: If the day-of-month is invalid for the month-year.
        """
        date_time = LocalDateTime.of_fields(year, month, day_of_month, hour, minute, second, nano_of_second)
        return OffsetDateTime(date_time, offset)

    @staticmethod
    def of_instant(instant: Instant, offset: ZoneOffset) -> "OffsetDateTime":
        """Return the OffsetDateTime of an instant as seen at the given offset.

        Args:
            instant: The instant.
            offset: The offset to view the instant at.

        Returns:
            An OffsetDateTime object

        Raises:
            FieldRangeError: If the result is outside the supported date range.
        """
        date_time = LocalDateTime.of_epoch_second(instant.epoch_second, instant.nano, offset)
        return OffsetDateTime(date_time, offset)

    @staticmethod
    def of_datetime(value: dt.datetime) -> "OffsetDateTime":
        """Convert a timezone-aware standard library ``datetime.datetime``.

        The offset in force at the datetime is used; the time zone itself is not retained.

        Args:
            value: An aware datetime.

        Returns:
            An OffsetDateTime object

        Raises:
            OffsetError: If the datetime is naive, or its offset is not a whole number of seconds.
        """
        utc_offset = value.utcoffset()
        if utc_offset is None:
            raise OffsetError(f"datetime must be timezone aware: {value!r}")
        if utc_offset.microseconds != 0:
            raise OffsetError(f"Zone offset must be a whole number of seconds: {utc_offset}")
        offset = ZoneOffset.of_total_seconds(utc_offset.days * 86_400 + utc_offset.seconds)
        date_time = LocalDateTime.of_fields(
            value.year, value.month, value.day, value.hour, value.minute, value.second, value.microsecond * 1_000
        )
        return OffsetDateTime(date_time, offset)

    @staticmethod
    def from_temporal(temporal: Any) -> "OffsetDateTime":
        if isinstance(temporal, OffsetDateTime):
            return temporal
        if isinstance(temporal, dt.datetime):
            return OffsetDateTime.of_datetime(temporal)
        raise UnsupportedFieldError(f"Unable to obtain OffsetDateTime from {type(temporal).__name__}: {temporal!r}")

    @staticmethod
    def parse(text: str) -> "OffsetDateTime":
        """Return an OffsetDateTime from ISO text such as ``2007-12-03T10:15:30+01:00``.

        The seconds and fraction of a second are optional, and the offset may be ``Z`` for UTC.

        Args:
            text: The text to parse.

        Returns:
            An OffsetDateTime object

        Raises:
            DateTimeParseError: If the text cannot be parsed.
        """
        matcher = _OFFSET_DATE_TIME_PATTERN.match(text)
        date_time = match_date_time(text, matcher)
        try:
            offset = ZoneOffset.of(matcher.group("offset").upper())
        except OffsetError as err:
            error_index = matcher.start("offset")
            raise DateTimeParseError(f"Text '{text}' could not be parsed: {err}", text, error_index) from err
        return OffsetDateTime(date_time, offset)

    # --------------------------------------------------------------------------
    # Accessors
    # --------------------------------------------------------------------------
    @property
    def offset(self) -> ZoneOffset:
        return self._offset

    def to_local_date_time(self) -> LocalDateTime:
        return self._date_time

    def to_local_date(self) -> LocalDate:
        return self._date_time.date

    def to_local_time(self) -> LocalTime:
        return self._date_time.time

    @property
    def year(self) -> int:
        return self._date_time.year

    @property
    def month(self) -> int:
        return self._date_time.month

    @property
    def day(self) -> int:
        return self._date_time.day

    @property
    def day_of_year(self) -> int:
        return self._date_time.day_of_year

    @property
    def day_of_week(self) -> DayOfWeek:
        return self._date_time.day_of_week

    @property
    def hour(self) -> int:
        return self._date_time.hour

    @property
    def minute(self) -> int:
        return self._date_time.minute

    @property
    def second(self) -> int:
        return self._date_time.second

    @property
    def nano(self) -> int:
        return self._date_time.nano

    def to_epoch_second(self) -> int:
        """The seconds since 1970-01-01T00:00:00Z."""
        return self._date_time.to_epoch_second(self._offset)

    def to_instant(self) -> Instant:
        return self._date_time.to_instant(self._offset)

    def to_datetime(self) -> dt.datetime:
        """Convert to an aware standard library ``datetime.datetime``, truncating to microseconds.

        Raises:
            FieldRangeError: If the year is outside the 1 to 9999 range of ``datetime.datetime``.
        """
        date = self._date_time.date.to_date()
        time = self._date_time.time
        return dt.datetime(
            date.year,
            date.month,
            date.day,
            time.hour,
            time.minute,
            time.second,
            time.nano // 1_000,
            tzinfo=self._offset.to_timezone(),
        )

    def timeline_order(self) -> tuple[int, int]:
        """A sort key that orders date-times by instant only, ignoring the offset.

        Example:
            sorted(values, key=OffsetDateTime.timeline_order)
        """
        return self.to_epoch_second(), self.nano

    # --------------------------------------------------------------------------
    # Offset changes
    # --------------------------------------------------------------------------
    def with_offset_same_local(self, offset: ZoneOffset) -> "OffsetDateTime":
        """Return a copy with a different offset, keeping the local date-time (so the instant changes)."""
        return self._with(self._date_time, offset)

    def with_offset_same_instant(self, offset: ZoneOffset) -> "OffsetDateTime":
        """Return a copy with a different offset, keeping the instant (so the local date-time changes).

        Args:
            offset: The new offset.

        Returns:
            An OffsetDateTime object, or this date-time if the offset is unchanged.

        Raises:
            FieldRangeError: If the result is outside the supported date range.
        """
        if offset == self._offset:
            return self
        difference = offset.total_seconds - self._offset.total_seconds
        adjusted = self._date_time.plus_seconds(difference)
        return OffsetDateTime(adjusted, offset)

    def _with(self, date_time: LocalDateTime, offset: ZoneOffset) -> "OffsetDateTime":
        if self._date_time == date_time and self._offset == offset:
            return self
        return OffsetDateTime(date_time, offset)

    # --------------------------------------------------------------------------
    # Field protocol
    # --------------------------------------------------------------------------
    def is_supported(self, field_or_unit: ChronoField | ChronoUnit) -> bool:
        if isinstance(field_or_unit, ChronoUnit):
            return field_or_unit != ChronoUnit.FOREVER
        return field_or_unit in _OFFSET_FIELDS or self._date_time.is_supported(field_or_unit)

    def range(self, field: ChronoField) -> ValueRange:
        if field in _OFFSET_FIELDS:
            return field.range
        return self._date_time.range(field)

    def get(self, field: ChronoField) -> int:
        """Get the value of a field that fits in an int.

        Raises:
            UnsupportedFieldError: If the field is not supported, or is INSTANT_SECONDS (use :meth:`get_long`).
        """
        if field == ChronoField.INSTANT_SECONDS:
            raise UnsupportedFieldError(f"Invalid field '{field}' for get() method, use get_long() instead")
        if field == ChronoField.OFFSET_SECONDS:
            return self._offset.total_seconds
        return self._date_time.get(field)

    def get_long(self, field: ChronoField) -> int:
        if field == ChronoField.INSTANT_SECONDS:
            return self.to_epoch_second()
        if field == ChronoField.OFFSET_SECONDS:
            return self._offset.total_seconds
        return self._date_time.get_long(field)

    def with_field(self, field: ChronoField, new_value: int) -> "OffsetDateTime":
        """Return a copy with a field changed.

        Setting INSTANT_SECONDS moves to that instant at the current offset, keeping the nano-of-second. Setting
        OFFSET_SECONDS changes the offset and keeps the local date-time. Other fields are changed on the local
        date-time and the offset is kept.

        Args:
            field: The field to change.
            new_value: The new value of the field.

        Returns:
            An OffsetDateTime object

        Raises:
            UnsupportedFieldError: If the field is not supported.
            FieldRangeError: If the value is out of range.
            OffsetError: If the new offset is out of range.
        """
        if field == ChronoField.INSTANT_SECONDS:
            return OffsetDateTime.of_instant(Instant.of_epoch_second(new_value, self.nano), self._offset)
        if field == ChronoField.OFFSET_SECONDS:
            offset = ZoneOffset.of_total_seconds(field.check_valid_int_value(new_value))
            return self._with(self._date_time, offset)
        return self._with(self._date_time.with_field(field, new_value), self._offset)

    def with_adjuster(self, adjuster: Any) -> "OffsetDateTime":
        """Return an adjusted copy, for example with a new date, time, offset or instant.

        Args:
            adjuster: Any object with an ``adjust_into`` method, such as a LocalDate, LocalTime, ZoneOffset, Instant
                or one of the adjusters in :mod:`iso_calendar.adjusters`.

        Returns:
            The adjusted date-time
        """
        if isinstance(adjuster, OffsetDateTime):
            return adjuster
        return adjuster.adjust_into(self)

    def with_year(self, year: int) -> "OffsetDateTime":
        return self._with(self._date_time.with_year(year), self._offset)

    def with_month(self, month: int) -> "OffsetDateTime":
        return self._with(self._date_time.with_month(month), self._offset)

    def with_day_of_month(self, day_of_month: int) -> "OffsetDateTime":
        return self._with(self._date_time.with_day_of_month(day_of_month), self._offset)

    def with_day_of_year(self, day_of_year: int) -> "OffsetDateTime":
        return self._with(self._date_time.with_day_of_year(day_of_year), self._offset)

    def with_hour(self, hour: int) -> "OffsetDateTime":
        return self._with(self._date_time.with_hour(hour), self._offset)

    def with_minute(self, minute: int) -> "OffsetDateTime":
        return self._with(self._date_time.with_minute(minute), self._offset)

    def with_second(self, second: int) -> "OffsetDateTime":
        return self._with(self._date_time.with_second(second), self._offset)

    def with_nano(self, nano_of_second: int) -> "OffsetDateTime":
        return self._with(self._date_time.with_nano(nano_of_second), self._offset)

    def truncated_to(self, unit: ChronoUnit) -> "OffsetDateTime":
        return self._with(self._date_time.truncated_to(unit), self._offset)

    # --------------------------------------------------------------------------
    # Arithmetic, on the local date-time with the offset unchanged
    # --------------------------------------------------------------------------
    def plus(self, amount: Any, unit: ChronoUnit | None = None) -> "OffsetDateTime":
        if unit is None:
            return amount.add_to(self)
        return self._with(self._date_time.plus(amount, unit), self._offset)

    def minus(self, amount: Any, unit: ChronoUnit | None = None) -> "OffsetDateTime":
        if unit is None:
            return amount.subtract_from(self)
        return self._with(self._date_time.minus(amount, unit), self._offset)

    def plus_years(self, years: int) -> "OffsetDateTime":
        return self._with(self._date_time.plus_years(years), self._offset)

    def plus_months(self, months: int) -> "OffsetDateTime":
        return self._with(self._date_time.plus_months(months), self._offset)

    def plus_weeks(self, weeks: int) -> "OffsetDateTime":
        return self._with(self._date_time.plus_weeks(weeks), self._offset)

    def plus_days(self, days: int) -> "OffsetDateTime":
        return self._with(self._date_time.plus_days(days), self._offset)

    def plus_hours(self, hours: int) -> "OffsetDateTime":
        return self._with(self._date_time.plus_hours(hours), self._offset)

    def plus_minutes(self, minutes: int) -> "OffsetDateTime":
        return self._with(self._date_time.plus_minutes(minutes), self._offset)

    def plus_seconds(self, seconds: int) -> "OffsetDateTime":
        return self._with(self._date_time.plus_seconds(seconds), self._offset)

    def plus_nanos(self, nanos: int) -> "OffsetDateTime":
        return self._with(self._date_time.plus_nanos(nanos), self._offset)

    def minus_years(self, years: int) -> "OffsetDateTime":
        return self.plus_years(-years)

    def minus_months(self, months: int) -> "OffsetDateTime":
        return self.plus_months(-months)

    def minus_weeks(self, weeks: int) -> "OffsetDateTime":
        return self.plus_weeks(-weeks)

    def minus_days(self, days: int) -> "OffsetDateTime":
        return self.plus_days(-days)

    def minus_hours(self, hours: int) -> "OffsetDateTime":
        return self.plus_hours(-hours)

    def minus_minutes(self, minutes: int) -> "OffsetDateTime":
        return self.plus_minutes(-minutes)

    def minus_seconds(self, seconds: int) -> "OffsetDateTime":
        return self.plus_seconds(-seconds)

    def minus_nanos(self, nanos: int) -> "OffsetDateTime":
        return self.plus_nanos(-nanos)

    def until(self, end_exclusive: Any, unit: ChronoUnit) -> int:
        """Calculate the number of complete units until another date-time.

        The end is first converted to this date-time's offset, then the local date-times are compared as by
        :meth:`LocalDateTime.until`.

        Args:
            end_exclusive: The end date-time.
            unit: The unit to measure in.

        Returns:
            The number of complete units, negative if the end is before this date-time.
        """
        end = OffsetDateTime.from_temporal(end_exclusive).with_offset_same_instant(self._offset)
        return self._date_time.until(end._date_time, unit)

    # --------------------------------------------------------------------------
    # Comparison
    # --------------------------------------------------------------------------
    def _compare_instant(self, other: "OffsetDateTime") -> int:
        if self._offset == other._offset:
            return self._date_time.compare_to(other._date_time)
        cmp = self.to_epoch_second() - other.to_epoch_second()
        if cmp == 0:
            cmp = self.nano - other.nano
        return cmp

    def compare_to(self, other: "OffsetDateTime") -> int:
        """Compare by instant, then by local date-time.

        Two date-times at the same instant with different offsets are ordered by their local date-time, so the
        ordering is consistent with ``==``.
        """
        cmp = self._compare_instant(other)
        if cmp == 0:
            cmp = self._date_time.compare_to(other._date_time)
        return cmp

    def is_after(self, other: "OffsetDateTime") -> bool:
        this_seconds = self.to_epoch_second()
        other_seconds = other.to_epoch_second()
        return this_seconds > other_seconds or (this_seconds == other_seconds and self.nano > other.nano)

    def is_before(self, other: "OffsetDateTime") -> bool:
        this_seconds = self.to_epoch_second()
        other_seconds = other.to_epoch_second()
        return this_seconds < other_seconds or (this_seconds == other_seconds and self.nano < other.nano)

    def is_equal(self, other: "OffsetDateTime") -> bool:
        """Check if both date-times represent the same instant, whatever their offsets."""
        return self.to_epoch_second() == other.to_epoch_second() and self.nano == other.nano

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, OffsetDateTime):
            return self._date_time == other._date_time and self._offset == other._offset
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._date_time, self._offset))

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __add__(self, other: Any) -> "OffsetDateTime":
        if isinstance(other, Period):
            return self.plus(other)
        return NotImplemented

    def __sub__(self, other: Any) -> "OffsetDateTime":
        if isinstance(other, Period):
            return self.minus(other)
        return NotImplemented

    def __str__(self) -> str:
        return f"{self._date_time}{self._offset}"

    def __repr__(self) -> str:
        return f"OffsetDateTime('{self}')"


OffsetDateTime.MIN = OffsetDateTime(LocalDateTime.MIN, ZoneOffset.MAX)
OffsetDateTime.MAX = OffsetDateTime(LocalDateTime.MAX, ZoneOffset.MIN)
