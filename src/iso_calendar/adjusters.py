"""
Adjusters: reusable strategies for changing a date, such as "the last day of the month".

An adjuster is any object with an ``adjust_into(temporal)`` method that returns an adjusted copy of the temporal
object. LocalDate, LocalTime, ZoneOffset, Instant and Year are adjusters themselves (they set their own value on the
target), and this module provides the calendar adjusters that are commonly needed.

Example usage:

    d = LocalDate.of(2024, 2, 10)
    d.with_adjuster(last_day_of_month())            # 2024-02-29
    d.with_adjuster(next_or_same(DayOfWeek.MONDAY))  # 2024-02-12
    d.with_adjuster(FieldAdjuster(ChronoField.MONTH_OF_YEAR, 4))  # 2024-04-10
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from iso_calendar.enums import ChronoUnit, DayOfWeek
from iso_calendar.fields import ChronoField


@runtime_checkable
class TemporalAdjuster(Protocol):
    """Protocol for objects that adjust a temporal object."""

    def adjust_into(self, temporal: Any) -> Any:
        """Return an adjusted copy of the temporal object."""
        ...


@dataclass(frozen=True)
class FieldAdjuster:
    """An adjuster that sets a single field to a fixed value, as by ``temporal.with_field(field, value)``.

    Attributes:
        field: The field to set.
        value: The new value of the field.
    """

    field: ChronoField
    value: int

    def adjust_into(self, temporal: Any) -> Any:
        return temporal.with_field(self.field, self.value)


@dataclass(frozen=True)
class CalendarAdjuster:
    """A named adjuster that applies a function to the temporal object.

    Attributes:
        name: The name of the adjustment, used in the repr.
        function: The function that performs the adjustment.
    """

    name: str
    function: Callable[[Any], Any] = field(repr=False, compare=False)

    def adjust_into(self, temporal: Any) -> Any:
        return self.function(temporal)


def _last_day_of_month(temporal: Any) -> Any:
    return temporal.with_field(ChronoField.DAY_OF_MONTH, temporal.range(ChronoField.DAY_OF_MONTH).maximum)


def _last_day_of_year(temporal: Any) -> Any:
    return temporal.with_field(ChronoField.DAY_OF_YEAR, temporal.range(ChronoField.DAY_OF_YEAR).maximum)


_FIRST_DAY_OF_MONTH = CalendarAdjuster("first_day_of_month", lambda t: t.with_field(ChronoField.DAY_OF_MONTH, 1))
_LAST_DAY_OF_MONTH = CalendarAdjuster("last_day_of_month", _last_day_of_month)
_FIRST_DAY_OF_NEXT_MONTH = CalendarAdjuster(
    "first_day_of_next_month", lambda t: t.with_field(ChronoField.DAY_OF_MONTH, 1).plus(1, ChronoUnit.MONTHS)
)
_FIRST_DAY_OF_YEAR = CalendarAdjuster("first_day_of_year", lambda t: t.with_field(ChronoField.DAY_OF_YEAR, 1))
_LAST_DAY_OF_YEAR = CalendarAdjuster("last_day_of_year", _last_day_of_year)


def first_day_of_month() -> CalendarAdjuster:
    return _FIRST_DAY_OF_MONTH


def last_day_of_month() -> CalendarAdjuster:
    """Return an adjuster that moves to the last day of the month, handling leap years."""
    return _LAST_DAY_OF_MONTH


def first_day_of_next_month() -> CalendarAdjuster:
    return _FIRST_DAY_OF_NEXT_MONTH


def first_day_of_year() -> CalendarAdjuster:
    return _FIRST_DAY_OF_YEAR


def last_day_of_year() -> CalendarAdjuster:
    return _LAST_DAY_OF_YEAR


def next_or_same(day_of_week: DayOfWeek) -> CalendarAdjuster:
    """Return an adjuster that moves forward to the given day-of-week, or stays if it is already that day.

    Args:
        day_of_week: The target day-of-week.

    Returns:
        A CalendarAdjuster
    """
    target = day_of_week.value

    def adjust(temporal: Any) -> Any:
        current = temporal.get(ChronoField.DAY_OF_WEEK)
        if current == target:
            return temporal
        return temporal.plus((target - current) % 7, ChronoUnit.DAYS)

    return CalendarAdjuster(f"next_or_same({day_of_week.name})", adjust)


def previous_or_same(day_of_week: DayOfWeek) -> CalendarAdjuster:
    """Return an adjuster that moves back to the given day-of-week, or stays if it is already that day."""
    target = day_of_week.value

    def adjust(temporal: Any) -> Any:
        current = temporal.get(ChronoField.DAY_OF_WEEK)
        if current == target:
            return temporal
        return temporal.minus((current - target) % 7, ChronoUnit.DAYS)

    return CalendarAdjuster(f"previous_or_same({day_of_week.name})", adjust)
