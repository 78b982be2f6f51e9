"""
Period: a date-based amount of time in years, months and days, such as ``P2Y3M4D``.

The three components are independent signed 32-bit values. A Period is never normalised implicitly, so adding
``P10M`` to ``P5M`` gives ``P15M`` rather than ``P1Y3M``; use :meth:`Period.normalized` to fold the months into years.

Example usage:

    To create a Period object use one of the static methods of the
    Period class:

       p1d = Period.of_days(1)
       p2w = Period.of_weeks(2)           # P14D
       p = Period.parse("P1Y2M3W4D")      # P1Y2M25D
       p = Period.between(LocalDate.of(2010, 1, 15), LocalDate.of(2011, 3, 18))  # P1Y2M3D

    Applying a Period to a date adds the years and months as a single step (so the end-of-month clamping is only
    done once) followed by the days:

       LocalDate.of(2008, 1, 31) + Period.of(1, 1, 1)  # 2009-03-01
"""

import re
from typing import TYPE_CHECKING, Any

from iso_calendar.enums import ChronoUnit
from iso_calendar.exceptions import ArithmeticOverflowError, DateTimeParseError, UnsupportedUnitError
from iso_calendar.utils import (
    add_exact,
    add_exact_int,
    multiply_exact_int,
    subtract_exact,
    to_int_exact,
    trunc_div,
    trunc_mod,
)

if TYPE_CHECKING:
    from iso_calendar.local_date import LocalDate

_RE_PERIOD = re.compile(
    r"(?P<sign>[-+]?)P"
    r"(?:(?P<years>[-+]?[0-9]+)Y)?"
    r"(?:(?P<months>[-+]?[0-9]+)M)?"
    r"(?:(?P<weeks>[-+]?[0-9]+)W)?"
    r"(?:(?P<days>[-+]?[0-9]+)D)?",
    re.IGNORECASE,
)

_SUPPORTED_UNITS = (ChronoUnit.YEARS, ChronoUnit.MONTHS, ChronoUnit.DAYS)


def _parse_number(value: str | None, negate: int) -> int:
    if value is None:
        return 0
    return multiply_exact_int(to_int_exact(int(value)), negate)


class Period:
    """An amount of time in years, months and days, such as ``P2Y3M4D``.

    Period instances are immutable and hashable. Two periods are equal only if all three components are equal, so
    ``P1Y`` is not equal to ``P12M``.
    """

    __slots__ = ("_years", "_months", "_days")

    ZERO: "Period"

    def __init__(self, years: int, months: int, days: int) -> None:
        # Use one of the of_... factories so that ZERO is returned for an empty period
        self._years = years
        self._months = months
        self._days = days

    # --------------------------------------------------------------------------
    # Factories
    # --------------------------------------------------------------------------
    @staticmethod
    def _create(years: int, months: int, days: int) -> "Period":
        if (years | months | days) == 0:
            return Period.ZERO
        return Period(years, months, days)

    @staticmethod
    def of(years: int, months: int, days: int) -> "Period":
        """Return a Period from a number of years, months and days.

        Args:
            years: The number of years, may be negative.
            months: The number of months, may be negative.
            days: The number of days, may be negative.

        Returns:
            A Period object, or Period.ZERO if all the amounts are zero.

        Raises:
            ArithmeticOverflowError: If any amount does not fit in a 32-bit int.
        """
        return Period._create(to_int_exact(years), to_int_exact(months), to_int_exact(days))

    @staticmethod
    def of_years(years: int) -> "Period":
        return Period.of(years, 0, 0)

    @staticmethod
    def of_months(months: int) -> "Period":
        return Period.of(0, months, 0)

    @staticmethod
    def of_weeks(weeks: int) -> "Period":
        """Return a Period of a number of weeks, stored as seven times as many days."""
        return Period._create(0, 0, multiply_exact_int(to_int_exact(weeks), 7))

    @staticmethod
    def of_days(days: int) -> "Period":
        return Period.of(0, 0, days)

    @staticmethod
    def from_amount(amount: Any) -> "Period":
        """Return a Period from another amount that is expressed in years, months and days.

        Args:
            amount: A Period, or any object with ``units`` and ``get(unit)`` members.

        Returns:
            A Period object

        Raises:
            UnsupportedUnitError: If the amount has a unit other than YEARS, MONTHS or DAYS.
            ArithmeticOverflowError: If any amount does not fit in a 32-bit int.
        """
        if isinstance(amount, Period):
            return amount
        years = months = days = 0
        for unit in amount.units:
            unit_amount = amount.get(unit)
            if unit == ChronoUnit.YEARS:
                years = to_int_exact(unit_amount)
            elif unit == ChronoUnit.MONTHS:
                months = to_int_exact(unit_amount)
            elif unit == ChronoUnit.DAYS:
                days = to_int_exact(unit_amount)
            else:
                raise UnsupportedUnitError(f"Unit must be Years, Months or Days, but was {unit}")
        return Period._create(years, months, days)

    @staticmethod
    def parse(text: str) -> "Period":
        """Return a Period from text such as ``P1Y2M3D``.

        The format is ``PnYnMnWnD``, where each of the four sections is optional but at least one must be
        present. The letters are case-insensitive and each number may be signed. A leading ``-`` before the ``P``
        negates the whole period. Weeks are converted to days.

        Examples:
            "P2Y"       -- Period.of_years(2)
            "P3M"       -- Period.of_months(3)
            "P4W"       -- Period.of_weeks(4)
            "P5D"       -- Period.of_days(5)
            "P1Y2M3D"   -- Period.of(1, 2, 3)
            "P1Y2M3W4D" -- Period.of(1, 2, 25)
            "P-1Y2M"    -- Period.of(-1, 2, 0)
            "-P1Y2M"    -- Period.of(-1, -2, 0)

        Args:
            text: The text to parse.

        Returns:
            A Period object

        Raises:
            DateTimeParseError: If the text is not a valid period, or any amount overflows a 32-bit int.
        """
        matcher = _RE_PERIOD.fullmatch(text)
        if matcher is None:
            raise DateTimeParseError("Text cannot be parsed to a Period", text, 0)
        groups = (matcher.group("years"), matcher.group("months"), matcher.group("weeks"), matcher.group("days"))
        if all(group is None for group in groups):
            raise DateTimeParseError("Text cannot be parsed to a Period", text, 0)
        negate = -1 if matcher.group("sign") == "-" else 1
        try:
            years, months, weeks, days = (_parse_number(group, negate) for group in groups)
            days = add_exact_int(days, multiply_exact_int(weeks, 7))
        except ArithmeticOverflowError as err:
            raise DateTimeParseError("Text cannot be parsed to a Period", text, 0) from err
        return Period._create(years, months, days)

    @staticmethod
    def between(start_date_inclusive: "LocalDate", end_date_exclusive: "LocalDate") -> "Period":
        """Return the Period between two dates, as calculated by :meth:`LocalDate.until`.

        Args:
            start_date_inclusive: The start date.
            end_date_exclusive: The end date.

        Returns:
            The Period between the dates, negative if the end is before the start.
        """
        return start_date_inclusive.until(end_date_exclusive)

    # --------------------------------------------------------------------------
    # Accessors
    # --------------------------------------------------------------------------
    @property
    def years(self) -> int:
        return self._years

    @property
    def months(self) -> int:
        return self._months

    @property
    def days(self) -> int:
        return self._days

    @property
    def units(self) -> tuple[ChronoUnit, ...]:
        """The units supported by :meth:`get`: YEARS, MONTHS and DAYS"""
        return _SUPPORTED_UNITS

    def get(self, unit: ChronoUnit) -> int:
        if unit == ChronoUnit.YEARS:
            return self._years
        if unit == ChronoUnit.MONTHS:
            return self._months
        if unit == ChronoUnit.DAYS:
            return self._days
        raise UnsupportedUnitError(f"Unsupported unit: {unit}")

    def is_zero(self) -> bool:
        return self is Period.ZERO or (self._years | self._months | self._days) == 0

    def is_negative(self) -> bool:
        """Check if any of the three components is negative."""
        return self._years < 0 or self._months < 0 or self._days < 0

    def to_total_months(self) -> int:
        """The total number of months in the years and months, ignoring the days."""
        return self._years * 12 + self._months

    @property
    def pl_interval(self) -> str:
        """A string that captures this period and which is suitable for use with Polars

        The returned string is defined using the Polars duration string language, and can be used in method calls
        such as:

            polars.date_range(..., interval=string, ...)

            polars.Expr.dt.offset_by(string)

        Returns:
            A string suitable for use with Polars, such as ``1y2mo3d``, prefixed with ``-`` when negative

        Raises:
            ValueError: If the components have different signs, which Polars cannot express.
        """
        if self.is_zero():
            return "0d"
        negative = self.is_negative()
        if negative and (self._years > 0 or self._months > 0 or self._days > 0):
            raise ValueError(f"Period {self} has components of mixed sign")
        interval = ""
        if self._years != 0:
            interval += f"{abs(self._years)}y"
        if self._months != 0:
            interval += f"{abs(self._months)}mo"
        if self._days != 0:
            interval += f"{abs(self._days)}d"
        return "-" + interval if negative else interval

    # --------------------------------------------------------------------------
    # Modification
    # --------------------------------------------------------------------------
    def with_years(self, years: int) -> "Period":
        if years == self._years:
            return self
        return Period._create(to_int_exact(years), self._months, self._days)

    def with_months(self, months: int) -> "Period":
        if months == self._months:
            return self
        return Period._create(self._years, to_int_exact(months), self._days)

    def with_days(self, days: int) -> "Period":
        if days == self._days:
            return self
        return Period._create(self._years, self._months, to_int_exact(days))

    def plus(self, amount_to_add: Any) -> "Period":
        """Return a copy of this period with another period added, component by component.

        No normalisation is performed, so ``P1Y6M`` plus ``P1Y8M`` is ``P2Y14M``.

        Args:
            amount_to_add: A Period, or an amount accepted by :meth:`from_amount`.

        Returns:
            A Period object

        Raises:
            ArithmeticOverflowError: If any component overflows a 32-bit int.
        """
        other = Period.from_amount(amount_to_add)
        return Period._create(
            add_exact_int(self._years, other._years),
            add_exact_int(self._months, other._months),
            add_exact_int(self._days, other._days),
        )

    def minus(self, amount_to_subtract: Any) -> "Period":
        other = Period.from_amount(amount_to_subtract)
        return Period._create(
            to_int_exact(self._years - other._years),
            to_int_exact(self._months - other._months),
            to_int_exact(self._days - other._days),
        )

    def plus_years(self, years_to_add: int) -> "Period":
        if years_to_add == 0:
            return self
        return Period._create(to_int_exact(add_exact(self._years, years_to_add)), self._months, self._days)

    def plus_months(self, months_to_add: int) -> "Period":
        if months_to_add == 0:
            return self
        return Period._create(self._years, to_int_exact(add_exact(self._months, months_to_add)), self._days)

    def plus_days(self, days_to_add: int) -> "Period":
        if days_to_add == 0:
            return self
        return Period._create(self._years, self._months, to_int_exact(add_exact(self._days, days_to_add)))

    def minus_years(self, years_to_subtract: int) -> "Period":
        if years_to_subtract == 0:
            return self
        return Period._create(to_int_exact(subtract_exact(self._years, years_to_subtract)), self._months, self._days)

    def minus_months(self, months_to_subtract: int) -> "Period":
        if months_to_subtract == 0:
            return self
        return Period._create(self._years, to_int_exact(subtract_exact(self._months, months_to_subtract)), self._days)

    def minus_days(self, days_to_subtract: int) -> "Period":
        if days_to_subtract == 0:
            return self
        return Period._create(self._years, self._months, to_int_exact(subtract_exact(self._days, days_to_subtract)))

    def multiplied_by(self, scalar: int) -> "Period":
        """Return a copy with each component multiplied by the scalar.

        Raises:
            ArithmeticOverflowError: If any component overflows a 32-bit int.
        """
        if self.is_zero() or scalar == 1:
            return self
        return Period._create(
            multiply_exact_int(self._years, scalar),
            multiply_exact_int(self._months, scalar),
            multiply_exact_int(self._days, scalar),
        )

    def negated(self) -> "Period":
        return self.multiplied_by(-1)

    def normalized(self) -> "Period":
        """Return a copy with the months folded into years so that the months are within -11 to 11.

        The years and months are given the same sign, for example ``P1Y-25M`` becomes ``P-1Y-1M``. The days are
        left unchanged.

        Returns:
            A Period object, or this period if it is already normalised.

        Raises:
            ArithmeticOverflowError: If the years overflow a 32-bit int.
        """
        total_months = self.to_total_months()
        split_years = trunc_div(total_months, 12)
        split_months = trunc_mod(total_months, 12)
        if split_years == self._years and split_months == self._months:
            return self
        return Period._create(to_int_exact(split_years), split_months, self._days)

    # --------------------------------------------------------------------------
    # Application to temporal objects
    # --------------------------------------------------------------------------
    def add_to(self, temporal: Any) -> Any:
        """Add this period to a temporal object such as a LocalDate.

        When there are months, the years and months are added together as a single number of months, so the
        end-of-month adjustment only happens once. The days are added last.

        Args:
            temporal: The object to adjust, with a ``plus(amount, unit)`` method.

        Returns:
            The adjusted object
        """
        if self._months == 0:
            if self._years != 0:
                temporal = temporal.plus(self._years, ChronoUnit.YEARS)
        else:
            total_months = self.to_total_months()
            if total_months != 0:
                temporal = temporal.plus(total_months, ChronoUnit.MONTHS)
        if self._days != 0:
            temporal = temporal.plus(self._days, ChronoUnit.DAYS)
        return temporal

    def subtract_from(self, temporal: Any) -> Any:
        """Subtract this period from a temporal object, in the same order as :meth:`add_to`."""
        if self._months == 0:
            if self._years != 0:
                temporal = temporal.minus(self._years, ChronoUnit.YEARS)
        else:
            total_months = self.to_total_months()
            if total_months != 0:
                temporal = temporal.minus(total_months, ChronoUnit.MONTHS)
        if self._days != 0:
            temporal = temporal.minus(self._days, ChronoUnit.DAYS)
        return temporal

    # --------------------------------------------------------------------------
    # Operators
    # --------------------------------------------------------------------------
    def __add__(self, other: Any) -> "Period":
        if isinstance(other, Period):
            return self.plus(other)
        return NotImplemented

    def __sub__(self, other: Any) -> "Period":
        if isinstance(other, Period):
            return self.minus(other)
        return NotImplemented

    def __mul__(self, other: Any) -> "Period":
        if isinstance(other, int) and not isinstance(other, bool):
            return self.multiplied_by(other)
        return NotImplemented

    __rmul__ = __mul__

    def __neg__(self) -> "Period":
        return self.negated()

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Period):
            return (self._years, self._months, self._days) == (other._years, other._months, other._days)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._years, self._months, self._days))

    def __str__(self) -> str:
        if self.is_zero():
            return "P0D"
        text = "P"
        if self._years != 0:
            text += f"{self._years}Y"
        if self._months != 0:
            text += f"{self._months}M"
        if self._days != 0:
            text += f"{self._days}D"
        return text

    def __repr__(self) -> str:
        return f"Period('{self}')"


Period.ZERO = Period(0, 0, 0)
