"""
ZoneOffset: a fixed offset from UTC, such as ``+02:00``.

Offsets range from ``-18:00`` to ``+18:00`` and are held as a total number of seconds. The canonical ID of an offset
is ``Z`` for UTC, ``±HH:MM`` otherwise, extended to ``±HH:MM:SS`` only when the seconds component is non-zero.

Offsets that are a whole number of quarter-hours (which covers every offset in real use) are interned in two caches,
one keyed by total seconds and one keyed by ID. The caches are a memoisation detail: equality and hashing depend
only on the total seconds, never on instance identity.
"""

import datetime as dt
import logging
import threading
from typing import Any

from iso_calendar.exceptions import DateTimeParseError, OffsetError, UnsupportedFieldError
from iso_calendar.fields import ChronoField, ValueRange

logger = logging.getLogger(__name__)

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3_600
MAX_SECONDS = 18 * SECONDS_PER_HOUR

_SECONDS_CACHE: dict[int, "ZoneOffset"] = {}
_ID_CACHE: dict[str, "ZoneOffset"] = {}
_CACHE_LOCK = threading.Lock()


def _build_id(total_seconds: int) -> str:
    """Build the canonical ID string for an offset.

    Args:
        total_seconds: The total offset in seconds.

    Returns:
        ``Z`` for zero, otherwise ``±HH:MM`` or ``±HH:MM:SS``
    """
    if total_seconds == 0:
        return "Z"
    sign = "-" if total_seconds < 0 else "+"
    abs_hours, remainder = divmod(abs(total_seconds), SECONDS_PER_HOUR)
    abs_minutes, abs_seconds = divmod(remainder, SECONDS_PER_MINUTE)
    offset_id = f"{sign}{abs_hours:02}:{abs_minutes:02}"
    if abs_seconds != 0:
        offset_id += f":{abs_seconds:02}"
    return offset_id


def _validate(hours: int, minutes: int, seconds: int) -> None:
    """Validate the components of an offset.

    Raises:
        OffsetError: If any component is out of range, or the signs of the components disagree.
    """
    if not -18 <= hours <= 18:
        raise OffsetError(f"Zone offset hours not in valid range: value {hours} is not in the range -18 to 18")
    if hours > 0:
        if minutes < 0 or seconds < 0:
            raise OffsetError("Zone offset minutes and seconds must be positive because hours is positive")
    elif hours < 0:
        if minutes > 0 or seconds > 0:
            raise OffsetError("Zone offset minutes and seconds must be negative because hours is negative")
    elif (minutes > 0 and seconds < 0) or (minutes < 0 and seconds > 0):
        raise OffsetError("Zone offset minutes and seconds must have the same sign")
    if not -59 <= minutes <= 59:
        raise OffsetError(f"Zone offset minutes not in valid range: value {minutes} is not in the range -59 to 59")
    if not -59 <= seconds <= 59:
        raise OffsetError(f"Zone offset seconds not in valid range: value {seconds} is not in the range -59 to 59")
    if abs(hours) == 18 and (minutes != 0 or seconds != 0):
        raise OffsetError("Zone offset not in valid range: -18:00 to +18:00")


def _parse_number(offset_id: str, pos: int, preceded_by_colon: bool) -> int:
    """Parse a two digit number from an offset ID.

    Args:
        offset_id: The full offset ID text.
        pos: The position of the first digit.
        preceded_by_colon: Whether a colon is required before the digits.

    Returns:
        The parsed number, from 0 to 99.

    Raises:
        DateTimeParseError: If the colon or digits are missing.
    """
    if preceded_by_colon and offset_id[pos - 1] != ":":
        raise DateTimeParseError(
            f"Invalid ID for ZoneOffset, colon not found when expected: {offset_id}", offset_id, pos - 1
        )
    digits = offset_id[pos : pos + 2]
    if not (len(digits) == 2 and digits.isascii() and digits.isdigit()):
        raise DateTimeParseError(
            f"Invalid ID for ZoneOffset, non numeric characters found: {offset_id}", offset_id, pos
        )
    return int(digits)


class ZoneOffset:
    """A time-zone offset from UTC, such as ``+02:00``.

    ZoneOffset instances are immutable and hashable. Two offsets are equal if they have the same total seconds.
    Sorting places larger offsets first, since for the same local time they denote an earlier instant.
    """

    __slots__ = ("_total_seconds", "_id")

    UTC: "ZoneOffset"
    MIN: "ZoneOffset"
    MAX: "ZoneOffset"

    def __init__(self, total_seconds: int) -> None:
        # Use one of the of_... factories to construct a validated, possibly cached, instance
        self._total_seconds = total_seconds
        self._id = _build_id(total_seconds)

    @staticmethod
    def of(offset_id: str) -> "ZoneOffset":
        """Return a ZoneOffset from an ID.

        The accepted formats are ``Z``, ``±h``, ``±hh``, ``±hh:mm``, ``±hhmm``, ``±hh:mm:ss`` and ``±hhmmss``.

        Args:
            offset_id: The offset ID.

        Returns:
            A ZoneOffset object

        Raises:
            DateTimeParseError: If the ID is not in a valid format.
            OffsetError: If the parsed offset is out of range.
        """
        cached = _ID_CACHE.get(offset_id)
        if cached is not None:
            return cached

        if offset_id == "Z":
            return ZoneOffset.UTC

        normalised_id = offset_id
        length = len(offset_id)
        if length == 2:
            normalised_id = offset_id[0] + "0" + offset_id[1]
            length = 3

        if length == 3:
            hours = _parse_number(normalised_id, 1, False)
            minutes = 0
            seconds = 0
        elif length == 5:
            hours = _parse_number(normalised_id, 1, False)
            minutes = _parse_number(normalised_id, 3, False)
            seconds = 0
        elif length == 6:
            hours = _parse_number(normalised_id, 1, False)
            minutes = _parse_number(normalised_id, 4, True)
            seconds = 0
        elif length == 7:
            hours = _parse_number(normalised_id, 1, False)
            minutes = _parse_number(normalised_id, 3, False)
            seconds = _parse_number(normalised_id, 5, False)
        elif length == 9:
            hours = _parse_number(normalised_id, 1, False)
            minutes = _parse_number(normalised_id, 4, True)
            seconds = _parse_number(normalised_id, 7, True)
        else:
            raise DateTimeParseError(f"Invalid ID for ZoneOffset, invalid format: {offset_id}", offset_id, 0)

        first = normalised_id[0]
        if first not in "+-":
            raise DateTimeParseError(
                f"Invalid ID for ZoneOffset, plus/minus not found when expected: {offset_id}", offset_id, 0
            )
        if first == "-":
            return ZoneOffset.of_hours_minutes_seconds(-hours, -minutes, -seconds)
        return ZoneOffset.of_hours_minutes_seconds(hours, minutes, seconds)

    @staticmethod
    def parse(offset_id: str) -> "ZoneOffset":
        """Alias of :meth:`of`, for symmetry with the other types' ``parse`` factories."""
        return ZoneOffset.of(offset_id)

    @staticmethod
    def of_hours(hours: int) -> "ZoneOffset":
        return ZoneOffset.of_hours_minutes_seconds(hours, 0, 0)

    @staticmethod
    def of_hours_minutes(hours: int, minutes: int) -> "ZoneOffset":
        return ZoneOffset.of_hours_minutes_seconds(hours, minutes, 0)

    @staticmethod
    def of_hours_minutes_seconds(hours: int, minutes: int, seconds: int) -> "ZoneOffset":
        """Return a ZoneOffset from hours, minutes and seconds.

        The sign of the minutes and seconds must match the sign of the hours (or be zero).

        Args:
            hours: The offset hours, from -18 to 18.
            minutes: The offset minutes, from -59 to 59.
            seconds: The offset seconds, from -59 to 59.

        Returns:
            A ZoneOffset object

        Raises:
            OffsetError: If the components are out of range or their signs are inconsistent.
        """
        _validate(hours, minutes, seconds)
        return ZoneOffset.of_total_seconds(hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE + seconds)

    @staticmethod
    def of_total_seconds(total_seconds: int) -> "ZoneOffset":
        """Return a ZoneOffset from a total offset in seconds.

        Args:
            total_seconds: The offset in seconds, from -64800 to +64800.

        Returns:
            A ZoneOffset object

        Raises:
            OffsetError: If the offset is out of range.
        """
        if not -MAX_SECONDS <= total_seconds <= MAX_SECONDS:
            raise OffsetError("Zone offset not in valid range: -18:00 to +18:00")
        if total_seconds % (15 * SECONDS_PER_MINUTE) != 0:
            return ZoneOffset(total_seconds)

        result = _SECONDS_CACHE.get(total_seconds)
        if result is None:
            with _CACHE_LOCK:
                result = _SECONDS_CACHE.setdefault(total_seconds, ZoneOffset(total_seconds))
                _ID_CACHE.setdefault(result.id, result)
            logger.debug("Cached zone offset %s", result.id)
        return result

    @staticmethod
    def from_temporal(temporal: Any) -> "ZoneOffset":
        """Return the ZoneOffset of any object supporting the OFFSET_SECONDS field."""
        if isinstance(temporal, ZoneOffset):
            return temporal
        return ZoneOffset.of_total_seconds(temporal.get(ChronoField.OFFSET_SECONDS))

    @property
    def total_seconds(self) -> int:
        """The total offset in seconds"""
        return self._total_seconds

    @property
    def id(self) -> str:
        """The canonical ID of the offset"""
        return self._id

    def to_timezone(self) -> dt.timezone:
        """Convert to a standard library ``datetime.timezone``."""
        if self._total_seconds == 0:
            return dt.timezone.utc
        return dt.timezone(dt.timedelta(seconds=self._total_seconds))

    # --------------------------------------------------------------------------
    # Field protocol
    # --------------------------------------------------------------------------
    def is_supported(self, field: ChronoField) -> bool:
        return field == ChronoField.OFFSET_SECONDS

    def range(self, field: ChronoField) -> ValueRange:
        if field == ChronoField.OFFSET_SECONDS:
            return field.range
        raise UnsupportedFieldError(f"Unsupported field: {field}")

    def get(self, field: ChronoField) -> int:
        return self.get_long(field)

    def get_long(self, field: ChronoField) -> int:
        if field == ChronoField.OFFSET_SECONDS:
            return self._total_seconds
        raise UnsupportedFieldError(f"Unsupported field: {field}")

    def adjust_into(self, temporal: Any) -> Any:
        """Set the offset of another temporal object to this offset."""
        return temporal.with_field(ChronoField.OFFSET_SECONDS, self._total_seconds)

    # --------------------------------------------------------------------------
    # Comparison
    # --------------------------------------------------------------------------
    def compare_to(self, other: "ZoneOffset") -> int:
        """Compare in descending order of total seconds."""
        return other._total_seconds - self._total_seconds

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, ZoneOffset):
            return self._total_seconds == other._total_seconds
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._total_seconds)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, ZoneOffset):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, ZoneOffset):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, ZoneOffset):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, ZoneOffset):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __str__(self) -> str:
        return self._id

    def __repr__(self) -> str:
        return f"ZoneOffset('{self._id}')"


ZoneOffset.UTC = ZoneOffset.of_total_seconds(0)
ZoneOffset.MIN = ZoneOffset.of_total_seconds(-MAX_SECONDS)
ZoneOffset.MAX = ZoneOffset.of_total_seconds(MAX_SECONDS)
