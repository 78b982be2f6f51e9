"""
Instant: a point on the time-line, held as seconds and nanoseconds since 1970-01-01T00:00:00Z.
"""

from typing import Any

from iso_calendar.enums import NANOS_PER_SECOND
from iso_calendar.exceptions import FieldRangeError, UnsupportedFieldError
from iso_calendar.fields import ChronoField
from iso_calendar.local_time import format_fraction
from iso_calendar.utils import add_exact, check_long
from iso_calendar.zone_offset import ZoneOffset

# Epoch seconds of -1000000000-01-01T00:00Z and 1000000000-12-31T23:59:59Z
MIN_SECOND = -31_557_014_167_219_200
MAX_SECOND = 31_556_889_864_403_199

_SUPPORTED_FIELDS = frozenset(
    [
        ChronoField.INSTANT_SECONDS,
        ChronoField.NANO_OF_SECOND,
        ChronoField.MICRO_OF_SECOND,
        ChronoField.MILLI_OF_SECOND,
    ]
)


class Instant:
    """An instantaneous point on the time-line, measured from the 1970-01-01T00:00:00Z epoch.

    Instant instances are immutable, hashable and sortable.
    """

    __slots__ = ("_seconds", "_nanos")

    EPOCH: "Instant"
    MIN: "Instant"
    MAX: "Instant"

    def __init__(self, epoch_second: int, nano_of_second: int) -> None:
        self._seconds = epoch_second
        self._nanos = nano_of_second

    @staticmethod
    def of_epoch_second(epoch_second: int, nano_adjustment: int = 0) -> "Instant":
        """Return an Instant from seconds since the epoch and a nanosecond adjustment.

        The adjustment may be negative or exceed one second; it is carried into the seconds.

        Args:
            epoch_second: The seconds since 1970-01-01T00:00:00Z.
            nano_adjustment: The nanoseconds to add to the seconds.

        Returns:
            An Instant object

        Raises:
            FieldRangeError: If the instant exceeds the minimum or maximum instant.
            ArithmeticOverflowError: If the seconds overflow.
        """
        carry, nanos = divmod(nano_adjustment, NANOS_PER_SECOND)
        return Instant._create(add_exact(epoch_second, carry), nanos)

    @staticmethod
    def of_epoch_milli(epoch_milli: int) -> "Instant":
        seconds, millis = divmod(epoch_milli, 1_000)
        return Instant._create(seconds, millis * 1_000_000)

    @staticmethod
    def from_temporal(temporal: Any) -> "Instant":
        if isinstance(temporal, Instant):
            return temporal
        return temporal.to_instant()

    @staticmethod
    def _create(seconds: int, nano_of_second: int) -> "Instant":
        if (seconds | nano_of_second) == 0:
            return Instant.EPOCH
        if not MIN_SECOND <= seconds <= MAX_SECOND:
            raise FieldRangeError("Instant exceeds minimum or maximum instant")
        return Instant(seconds, nano_of_second)

    @property
    def epoch_second(self) -> int:
        return self._seconds

    @property
    def nano(self) -> int:
        """The nanosecond within the second, from 0 to 999,999,999"""
        return self._nanos

    def to_epoch_milli(self) -> int:
        """Convert to milliseconds since the epoch, truncating any finer precision towards the past.

        Raises:
            ArithmeticOverflowError: If the result does not fit in a 64-bit long.
        """
        return check_long(self._seconds * 1_000 + self._nanos // 1_000_000)

    def is_supported(self, field: ChronoField) -> bool:
        return field in _SUPPORTED_FIELDS

    def get_long(self, field: ChronoField) -> int:
        if field == ChronoField.INSTANT_SECONDS:
            return self._seconds
        if field == ChronoField.NANO_OF_SECOND:
            return self._nanos
        if field == ChronoField.MICRO_OF_SECOND:
            return self._nanos // 1_000
        if field == ChronoField.MILLI_OF_SECOND:
            return self._nanos // 1_000_000
        raise UnsupportedFieldError(f"Unsupported field: {field}")

    def adjust_into(self, temporal: Any) -> Any:
        """Set the instant of another temporal object, such as an OffsetDateTime, to this instant."""
        return temporal.with_field(ChronoField.INSTANT_SECONDS, self._seconds).with_field(
            ChronoField.NANO_OF_SECOND, self._nanos
        )

    def plus_seconds(self, seconds_to_add: int) -> "Instant":
        return self._plus(seconds_to_add, 0)

    def plus_millis(self, millis_to_add: int) -> "Instant":
        seconds, millis = divmod(millis_to_add, 1_000)
        return self._plus(seconds, millis * 1_000_000)

    def plus_nanos(self, nanos_to_add: int) -> "Instant":
        return self._plus(0, nanos_to_add)

    def minus_seconds(self, seconds_to_subtract: int) -> "Instant":
        return self.plus_seconds(-seconds_to_subtract)

    def minus_millis(self, millis_to_subtract: int) -> "Instant":
        return self.plus_millis(-millis_to_subtract)

    def minus_nanos(self, nanos_to_subtract: int) -> "Instant":
        return self.plus_nanos(-nanos_to_subtract)

    def _plus(self, seconds_to_add: int, nanos_to_add: int) -> "Instant":
        if (seconds_to_add | nanos_to_add) == 0:
            return self
        return Instant.of_epoch_second(add_exact(self._seconds, seconds_to_add), self._nanos + nanos_to_add)

    def compare_to(self, other: "Instant") -> int:
        cmp = self._seconds - other._seconds
        if cmp != 0:
            return cmp
        return self._nanos - other._nanos

    def is_after(self, other: "Instant") -> bool:
        return self.compare_to(other) > 0

    def is_before(self, other: "Instant") -> bool:
        return self.compare_to(other) < 0

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Instant):
            return self._seconds == other._seconds and self._nanos == other._nanos
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._seconds, self._nanos))

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __str__(self) -> str:
        from iso_calendar.local_date_time import LocalDateTime  # noqa: PLC0415

        ldt = LocalDateTime.of_epoch_second(self._seconds, self._nanos, ZoneOffset.UTC)
        return f"{ldt.date}T{ldt.hour:02}:{ldt.minute:02}:{ldt.second:02}{format_fraction(self._nanos)}Z"

    def __repr__(self) -> str:
        return f"Instant('{self}')"


Instant.EPOCH = Instant(0, 0)
Instant.MIN = Instant(MIN_SECOND, 0)
Instant.MAX = Instant(MAX_SECOND, 999_999_999)
