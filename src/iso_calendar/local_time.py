"""
LocalTime: a time-of-day without a date or offset, such as ``10:15:30``.

Time is held to nanosecond precision. Arithmetic on a LocalTime wraps around midnight; the date-time types carry
the overflow into their date part instead.
"""

import re
from typing import TYPE_CHECKING, Any

from iso_calendar.enums import NANOS_PER_SECOND, SECONDS_PER_DAY, ChronoUnit
from iso_calendar.exceptions import UnsupportedFieldError, UnsupportedUnitError
from iso_calendar.fields import ChronoField, ValueRange
from iso_calendar.parsing import TIME_PARTS, TextPattern, parse_field
from iso_calendar.utils import trunc_div

if TYPE_CHECKING:
    from iso_calendar.local_date import LocalDate
    from iso_calendar.local_date_time import LocalDateTime
    from iso_calendar.zone_offset import ZoneOffset

HOURS_PER_DAY = 24
MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = MINUTES_PER_HOUR * HOURS_PER_DAY
SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = SECONDS_PER_MINUTE * MINUTES_PER_HOUR
NANOS_PER_MINUTE = NANOS_PER_SECOND * SECONDS_PER_MINUTE
NANOS_PER_HOUR = NANOS_PER_MINUTE * MINUTES_PER_HOUR
NANOS_PER_DAY = NANOS_PER_HOUR * HOURS_PER_DAY
MICROS_PER_DAY = NANOS_PER_DAY // 1_000
MILLIS_PER_DAY = NANOS_PER_DAY // 1_000_000

TIME_FIELDS = frozenset(
    [
        ChronoField.NANO_OF_SECOND,
        ChronoField.NANO_OF_DAY,
        ChronoField.MICRO_OF_SECOND,
        ChronoField.MICRO_OF_DAY,
        ChronoField.MILLI_OF_SECOND,
        ChronoField.MILLI_OF_DAY,
        ChronoField.SECOND_OF_MINUTE,
        ChronoField.SECOND_OF_DAY,
        ChronoField.MINUTE_OF_HOUR,
        ChronoField.MINUTE_OF_DAY,
        ChronoField.HOUR_OF_AMPM,
        ChronoField.CLOCK_HOUR_OF_AMPM,
        ChronoField.HOUR_OF_DAY,
        ChronoField.CLOCK_HOUR_OF_DAY,
        ChronoField.AMPM_OF_DAY,
    ]
)

_TIME_PATTERN = TextPattern("a LocalTime", TIME_PARTS)


def format_fraction(nano: int) -> str:
    """Format a nano-of-second as a fraction in groups of three digits, e.g. ``.500`` or ``.000001``.

    Args:
        nano: The nano-of-second, from 0 to 999,999,999.

    Returns:
        The fraction including the leading dot, or an empty string for zero.
    """
    if nano == 0:
        return ""
    if nano % 1_000_000 == 0:
        return f".{nano // 1_000_000:03}"
    if nano % 1_000 == 0:
        return f".{nano // 1_000:06}"
    return f".{nano:09}"


def parse_fraction(fraction: str | None) -> int:
    """Convert up to nine fraction-of-second digits into nanoseconds."""
    if not fraction:
        return 0
    return int(fraction.ljust(9, "0"))


def match_time(text: str, matcher: re.Match) -> "LocalTime":
    """Build a LocalTime from a match defining the groups hour, minute, second and fraction.

    The second and fraction groups are optional.

    Raises:
        DateTimeParseError: If a matched value is out of range, carrying the index of the bad group.
    """
    hour = parse_field(text, matcher, "hour", ChronoField.HOUR_OF_DAY)
    minute = parse_field(text, matcher, "minute", ChronoField.MINUTE_OF_HOUR)
    second = parse_field(text, matcher, "second", ChronoField.SECOND_OF_MINUTE)
    return LocalTime._create(hour, minute, second, parse_fraction(matcher.group("fraction")))


class LocalTime:
    """A time-of-day without a date or offset, such as ``10:15:30``.

    LocalTime instances are immutable, hashable and sortable.
    """

    __slots__ = ("_hour", "_minute", "_second", "_nano")

    MIN: "LocalTime"
    MAX: "LocalTime"
    MIDNIGHT: "LocalTime"
    NOON: "LocalTime"

    def __init__(self, hour: int, minute: int, second: int, nano_of_second: int) -> None:
        # Use one of the of_... factories to construct a validated instance
        self._hour = hour
        self._minute = minute
        self._second = second
        self._nano = nano_of_second

    @staticmethod
    def of(hour: int, minute: int, second: int = 0, nano_of_second: int = 0) -> "LocalTime":
        """Return a LocalTime from an hour, minute, second and nanosecond.

        Args:
            hour: The hour-of-day, from 0 to 23.
            minute: The minute-of-hour, from 0 to 59.
            second: The second-of-minute, from 0 to 59.
            nano_of_second: The nano-of-second, from 0 to 999,999,999.

        Returns:
            A LocalTime object

        Raises:
            FieldRangeError: If any value is out of range.
        """
        ChronoField.HOUR_OF_DAY.check_valid_value(hour)
        ChronoField.MINUTE_OF_HOUR.check_valid_value(minute)
        ChronoField.SECOND_OF_MINUTE.check_valid_value(second)
        ChronoField.NANO_OF_SECOND.check_valid_value(nano_of_second)
        return LocalTime._create(hour, minute, second, nano_of_second)

    @staticmethod
    def of_second_of_day(second_of_day: int) -> "LocalTime":
        ChronoField.SECOND_OF_DAY.check_valid_value(second_of_day)
        hours, remainder = divmod(second_of_day, SECONDS_PER_HOUR)
        minutes, seconds = divmod(remainder, SECONDS_PER_MINUTE)
        return LocalTime._create(hours, minutes, seconds, 0)

    @staticmethod
    def of_nano_of_day(nano_of_day: int) -> "LocalTime":
        """Return a LocalTime from a count of nanoseconds since midnight.

        Args:
            nano_of_day: The nano-of-day, from 0 to 24 * 60 * 60 * 1,000,000,000 - 1.

        Returns:
            A LocalTime object

        Raises:
            FieldRangeError: If the nano-of-day is out of range.
        """
        ChronoField.NANO_OF_DAY.check_valid_value(nano_of_day)
        hours, remainder = divmod(nano_of_day, NANOS_PER_HOUR)
        minutes, remainder = divmod(remainder, NANOS_PER_MINUTE)
        seconds, nanos = divmod(remainder, NANOS_PER_SECOND)
        return LocalTime._create(hours, minutes, seconds, nanos)

    @staticmethod
    def parse(text: str) -> "LocalTime":
        """Return a LocalTime from text such as ``10:15``, ``10:15:30`` or ``10:15:30.123456789``.

        Args:
            text: The text to parse.

        Returns:
            A LocalTime object

        Raises:
            DateTimeParseError: If the text cannot be parsed.
        """
        return match_time(text, _TIME_PATTERN.match(text))

    @staticmethod
    def from_temporal(temporal: Any) -> "LocalTime":
        if isinstance(temporal, LocalTime):
            return temporal
        return LocalTime.of_nano_of_day(temporal.get_long(ChronoField.NANO_OF_DAY))

    @staticmethod
    def _create(hour: int, minute: int, second: int, nano_of_second: int) -> "LocalTime":
        if (minute | second | nano_of_second) == 0:
            return _HOURS[hour]
        return LocalTime(hour, minute, second, nano_of_second)

    @property
    def hour(self) -> int:
        return self._hour

    @property
    def minute(self) -> int:
        return self._minute

    @property
    def second(self) -> int:
        return self._second

    @property
    def nano(self) -> int:
        return self._nano

    def to_second_of_day(self) -> int:
        return self._hour * SECONDS_PER_HOUR + self._minute * SECONDS_PER_MINUTE + self._second

    def to_nano_of_day(self) -> int:
        return (
            self._hour * NANOS_PER_HOUR
            + self._minute * NANOS_PER_MINUTE
            + self._second * NANOS_PER_SECOND
            + self._nano
        )

    def to_epoch_second(self, date: "LocalDate", offset: "ZoneOffset") -> int:
        """Combine with a date and offset to calculate the seconds since 1970-01-01T00:00:00Z."""
        return date.to_epoch_day() * SECONDS_PER_DAY + self.to_second_of_day() - offset.total_seconds

    def at_date(self, date: "LocalDate") -> "LocalDateTime":
        from iso_calendar.local_date_time import LocalDateTime  # noqa: PLC0415

        return LocalDateTime.of(date, self)

    # --------------------------------------------------------------------------
    # Field protocol
    # --------------------------------------------------------------------------
    def is_supported(self, field_or_unit: ChronoField | ChronoUnit) -> bool:
        if isinstance(field_or_unit, ChronoUnit):
            return field_or_unit.is_time_based
        return field_or_unit in TIME_FIELDS

    def range(self, field: ChronoField) -> ValueRange:
        if field in TIME_FIELDS:
            return field.range
        raise UnsupportedFieldError(f"Unsupported field: {field}")

    def get(self, field: ChronoField) -> int:
        """Get the value of a field that fits in an int.

        Raises:
            UnsupportedFieldError: If the field is not supported, or is NANO_OF_DAY or MICRO_OF_DAY (use
                :meth:`get_long` for those).
        """
        if field in (ChronoField.NANO_OF_DAY, ChronoField.MICRO_OF_DAY):
            raise UnsupportedFieldError(f"Invalid field '{field}' for get() method, use get_long() instead")
        return self.get_long(field)

    def get_long(self, field: ChronoField) -> int:
        if field == ChronoField.NANO_OF_SECOND:
            return self._nano
        if field == ChronoField.NANO_OF_DAY:
            return self.to_nano_of_day()
        if field == ChronoField.MICRO_OF_SECOND:
            return self._nano // 1_000
        if field == ChronoField.MICRO_OF_DAY:
            return self.to_nano_of_day() // 1_000
        if field == ChronoField.MILLI_OF_SECOND:
            return self._nano // 1_000_000
        if field == ChronoField.MILLI_OF_DAY:
            return self.to_nano_of_day() // 1_000_000
        if field == ChronoField.SECOND_OF_MINUTE:
            return self._second
        if field == ChronoField.SECOND_OF_DAY:
            return self.to_second_of_day()
        if field == ChronoField.MINUTE_OF_HOUR:
            return self._minute
        if field == ChronoField.MINUTE_OF_DAY:
            return self._hour * MINUTES_PER_HOUR + self._minute
        if field == ChronoField.HOUR_OF_AMPM:
            return self._hour % 12
        if field == ChronoField.CLOCK_HOUR_OF_AMPM:
            ham = self._hour % 12
            return 12 if ham == 0 else ham
        if field == ChronoField.HOUR_OF_DAY:
            return self._hour
        if field == ChronoField.CLOCK_HOUR_OF_DAY:
            return 24 if self._hour == 0 else self._hour
        if field == ChronoField.AMPM_OF_DAY:
            return self._hour // 12
        raise UnsupportedFieldError(f"Unsupported field: {field}")

    def with_field(self, field: ChronoField, new_value: int) -> "LocalTime":
        """Return a copy of this time with a field changed.

        Fields that are relative to another field (such as the hour of AM/PM) move the time by the difference
        between the current and the new value.

        Args:
            field: A time field.
            new_value: The new value of the field.

        Returns:
            A LocalTime object

        Raises:
            UnsupportedFieldError: If the field is not a time field.
            FieldRangeError: If the value is out of range.
        """
        if field not in TIME_FIELDS:
            raise UnsupportedFieldError(f"Unsupported field: {field}")
        field.check_valid_value(new_value)
        if field == ChronoField.NANO_OF_SECOND:
            return self.with_nano(new_value)
        if field == ChronoField.NANO_OF_DAY:
            return LocalTime.of_nano_of_day(new_value)
        if field == ChronoField.MICRO_OF_SECOND:
            return self.with_nano(new_value * 1_000)
        if field == ChronoField.MICRO_OF_DAY:
            return LocalTime.of_nano_of_day(new_value * 1_000)
        if field == ChronoField.MILLI_OF_SECOND:
            return self.with_nano(new_value * 1_000_000)
        if field == ChronoField.MILLI_OF_DAY:
            return LocalTime.of_nano_of_day(new_value * 1_000_000)
        if field == ChronoField.SECOND_OF_MINUTE:
            return self.with_second(new_value)
        if field == ChronoField.SECOND_OF_DAY:
            return self.plus_seconds(new_value - self.to_second_of_day())
        if field == ChronoField.MINUTE_OF_HOUR:
            return self.with_minute(new_value)
        if field == ChronoField.MINUTE_OF_DAY:
            return self.plus_minutes(new_value - (self._hour * MINUTES_PER_HOUR + self._minute))
        if field == ChronoField.HOUR_OF_AMPM:
            return self.plus_hours(new_value - self._hour % 12)
        if field == ChronoField.CLOCK_HOUR_OF_AMPM:
            return self.plus_hours((0 if new_value == 12 else new_value) - self._hour % 12)
        if field == ChronoField.HOUR_OF_DAY:
            return self.with_hour(new_value)
        if field == ChronoField.CLOCK_HOUR_OF_DAY:
            return self.with_hour(0 if new_value == 24 else new_value)
        # AMPM_OF_DAY
        return self.plus_hours((new_value - self._hour // 12) * 12)

    def with_hour(self, hour: int) -> "LocalTime":
        if self._hour == hour:
            return self
        ChronoField.HOUR_OF_DAY.check_valid_value(hour)
        return LocalTime._create(hour, self._minute, self._second, self._nano)

    def with_minute(self, minute: int) -> "LocalTime":
        if self._minute == minute:
            return self
        ChronoField.MINUTE_OF_HOUR.check_valid_value(minute)
        return LocalTime._create(self._hour, minute, self._second, self._nano)

    def with_second(self, second: int) -> "LocalTime":
        if self._second == second:
            return self
        ChronoField.SECOND_OF_MINUTE.check_valid_value(second)
        return LocalTime._create(self._hour, self._minute, second, self._nano)

    def with_nano(self, nano_of_second: int) -> "LocalTime":
        if self._nano == nano_of_second:
            return self
        ChronoField.NANO_OF_SECOND.check_valid_value(nano_of_second)
        return LocalTime._create(self._hour, self._minute, self._second, nano_of_second)

    def adjust_into(self, temporal: Any) -> Any:
        """Set the time of another temporal object to this time."""
        return temporal.with_field(ChronoField.NANO_OF_DAY, self.to_nano_of_day())

    # --------------------------------------------------------------------------
    # Arithmetic, wrapping around midnight
    # --------------------------------------------------------------------------
    def plus(self, amount: Any, unit: ChronoUnit | None = None) -> "LocalTime":
        """Return a copy of this time with an amount added, wrapping around midnight.

        Args:
            amount: The number of units to add, or an amount object when no unit is given.
            unit: A time-based unit, from NANOS to HALF_DAYS.

        Returns:
            A LocalTime object

        Raises:
            UnsupportedUnitError: If the unit is not time-based.
        """
        if unit is None:
            return amount.add_to(self)
        if unit == ChronoUnit.NANOS:
            return self.plus_nanos(amount)
        if unit == ChronoUnit.MICROS:
            return self.plus_nanos((amount % MICROS_PER_DAY) * 1_000)
        if unit == ChronoUnit.MILLIS:
            return self.plus_nanos((amount % MILLIS_PER_DAY) * 1_000_000)
        if unit == ChronoUnit.SECONDS:
            return self.plus_seconds(amount)
        if unit == ChronoUnit.MINUTES:
            return self.plus_minutes(amount)
        if unit == ChronoUnit.HOURS:
            return self.plus_hours(amount)
        if unit == ChronoUnit.HALF_DAYS:
            return self.plus_hours((amount % 2) * 12)
        raise UnsupportedUnitError(f"Unsupported unit: {unit}")

    def minus(self, amount: Any, unit: ChronoUnit | None = None) -> "LocalTime":
        if unit is None:
            return amount.subtract_from(self)
        return self.plus(-amount, unit)

    def plus_hours(self, hours: int) -> "LocalTime":
        if hours == 0:
            return self
        new_hour = (self._hour + hours) % HOURS_PER_DAY
        return LocalTime._create(new_hour, self._minute, self._second, self._nano)

    def plus_minutes(self, minutes: int) -> "LocalTime":
        if minutes == 0:
            return self
        mofd = self._hour * MINUTES_PER_HOUR + self._minute
        new_mofd = (mofd + minutes) % MINUTES_PER_DAY
        if mofd == new_mofd:
            return self
        new_hour, new_minute = divmod(new_mofd, MINUTES_PER_HOUR)
        return LocalTime._create(new_hour, new_minute, self._second, self._nano)

    def plus_seconds(self, seconds: int) -> "LocalTime":
        if seconds == 0:
            return self
        sofd = self.to_second_of_day()
        new_sofd = (sofd + seconds) % SECONDS_PER_DAY
        if sofd == new_sofd:
            return self
        new_hour, remainder = divmod(new_sofd, SECONDS_PER_HOUR)
        new_minute, new_second = divmod(remainder, SECONDS_PER_MINUTE)
        return LocalTime._create(new_hour, new_minute, new_second, self._nano)

    def plus_nanos(self, nanos: int) -> "LocalTime":
        if nanos == 0:
            return self
        nofd = self.to_nano_of_day()
        new_nofd = (nofd + nanos) % NANOS_PER_DAY
        if nofd == new_nofd:
            return self
        return LocalTime.of_nano_of_day(new_nofd)

    def minus_hours(self, hours: int) -> "LocalTime":
        return self.plus_hours(-hours)

    def minus_minutes(self, minutes: int) -> "LocalTime":
        return self.plus_minutes(-minutes)

    def minus_seconds(self, seconds: int) -> "LocalTime":
        return self.plus_seconds(-seconds)

    def minus_nanos(self, nanos: int) -> "LocalTime":
        return self.plus_nanos(-nanos)

    def truncated_to(self, unit: ChronoUnit) -> "LocalTime":
        """Return a copy of this time truncated to the given unit.

        Args:
            unit: A unit that divides a day without remainder, from NANOS to DAYS.

        Returns:
            A LocalTime object

        Raises:
            UnsupportedUnitError: If the unit is longer than a day or does not divide a day exactly.
        """
        if unit == ChronoUnit.NANOS:
            return self
        if unit == ChronoUnit.DAYS:
            return LocalTime.MIDNIGHT
        dur = unit.duration_nanos
        if NANOS_PER_DAY % dur != 0:
            raise UnsupportedUnitError("Unit must divide into a standard day without remainder")
        nod = self.to_nano_of_day()
        return LocalTime.of_nano_of_day((nod // dur) * dur)

    def until(self, end_exclusive: Any, unit: ChronoUnit) -> int:
        """Calculate the number of whole time units until another time.

        Args:
            end_exclusive: The end time.
            unit: A time-based unit.

        Returns:
            The number of complete units, negative if the end is before this time.

        Raises:
            UnsupportedUnitError: If the unit is not time-based.
        """
        end = LocalTime.from_temporal(end_exclusive)
        if not unit.is_time_based:
            raise UnsupportedUnitError(f"Unsupported unit: {unit}")
        nanos_until = end.to_nano_of_day() - self.to_nano_of_day()
        return trunc_div(nanos_until, unit.duration_nanos)

    # --------------------------------------------------------------------------
    # Comparison
    # --------------------------------------------------------------------------
    def _key(self) -> tuple[int, int, int, int]:
        return self._hour, self._minute, self._second, self._nano

    def compare_to(self, other: "LocalTime") -> int:
        a, b = self._key(), other._key()
        return (a > b) - (a < b)

    def is_after(self, other: "LocalTime") -> bool:
        return self.compare_to(other) > 0

    def is_before(self, other: "LocalTime") -> bool:
        return self.compare_to(other) < 0

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, LocalTime):
            return self._key() == other._key()
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._key() >= other._key()

    def __str__(self) -> str:
        text = f"{self._hour:02}:{self._minute:02}"
        if self._second > 0 or self._nano > 0:
            text += f":{self._second:02}{format_fraction(self._nano)}"
        return text

    def __repr__(self) -> str:
        return f"LocalTime('{self}')"


_HOURS = tuple(LocalTime(hour, 0, 0, 0) for hour in range(HOURS_PER_DAY))

LocalTime.MIN = _HOURS[0]
LocalTime.MIDNIGHT = _HOURS[0]
LocalTime.NOON = _HOURS[12]
LocalTime.MAX = LocalTime(23, 59, 59, 999_999_999)
