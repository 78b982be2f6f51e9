"""
Iso-Calendar Interop Module.

This module converts iso_calendar values to and from the columnar types used for time series work:

- Polars ``Date`` series, which store a 32-bit epoch day per value;
- Polars ``Datetime`` series, which store a 64-bit count of micro- (or milli-, or nano-) seconds since the epoch;
- NumPy ``datetime64[D]`` arrays, which store a 64-bit epoch day per value.

The conversions go through the epoch day and epoch second, so they are exact across the whole range supported by
the target type. Values that do not fit raise an :class:`ArithmeticOverflowError` rather than wrapping around.
Missing values (``None`` on the Python side, null or NaT on the columnar side) are passed through.
"""

import logging
from collections.abc import Iterable

import numpy as np
import polars as pl

from iso_calendar.exceptions import ArithmeticOverflowError
from iso_calendar.fields import INT_MAX, INT_MIN
from iso_calendar.instant import Instant
from iso_calendar.local_date import LocalDate
from iso_calendar.offset_date_time import OffsetDateTime
from iso_calendar.period import Period
from iso_calendar.utils import check_long
from iso_calendar.zone_offset import ZoneOffset

logger = logging.getLogger(__name__)

_NANOS_PER_TIME_UNIT = {"ns": 1, "us": 1_000, "ms": 1_000_000}


def _to_polars_epoch_day(date: LocalDate) -> int:
    epoch_day = date.to_epoch_day()
    if not INT_MIN <= epoch_day <= INT_MAX:
        raise ArithmeticOverflowError(f"Date {date} is outside the range of a Polars Date")
    return epoch_day


def dates_to_series(dates: Iterable[LocalDate | None], name: str = "date") -> pl.Series:
    """Convert dates into a Polars series of dtype ``pl.Date``.

    Args:
        dates: The dates to convert. None values become nulls.
        name: The name of the series.

    Returns:
        A Polars Date series

    Raises:
        ArithmeticOverflowError: If a date is outside the 32-bit epoch day range of a Polars Date.
    """
    epoch_days = [None if date is None else _to_polars_epoch_day(date) for date in dates]
    logger.debug("Converting %d dates to Polars series '%s'", len(epoch_days), name)
    return pl.Series(name, epoch_days, dtype=pl.Int32).cast(pl.Date)


def series_to_dates(series: pl.Series) -> list[LocalDate | None]:
    """Convert a Polars ``Date`` series into a list of LocalDate (None for nulls).

    Args:
        series: A series of dtype ``pl.Date``.

    Returns:
        The list of dates

    Raises:
        TypeError: If the series is not of dtype ``pl.Date``.
    """
    if series.dtype != pl.Date:
        raise TypeError(f"Expected a series of dtype Date, got {series.dtype}")
    return [None if day is None else LocalDate.of_epoch_day(day) for day in series.cast(pl.Int32).to_list()]


def date_range_series(
    start: LocalDate, end_exclusive: LocalDate, step: Period | None = None, name: str = "date"
) -> pl.Series:
    """Build a Polars ``Date`` series from ``start`` (inclusive) to ``end_exclusive``, as by
    :meth:`LocalDate.dates_until`.

    Unlike ``polars.date_range``, month-based steps are always measured from the start date, so a monthly series
    starting on the 31st gives the last day of each shorter month without drifting.

    Args:
        start: The first date.
        end_exclusive: The end date, not included.
        step: The step between dates, one day if None.
        name: The name of the series.

    Returns:
        A Polars Date series
    """
    return dates_to_series(start.dates_until(end_exclusive, step), name)


def offset_by_period(series: pl.Series, period: Period) -> pl.Series:
    """Shift a Polars ``Date`` or ``Datetime`` series by a Period, using its Polars interval string.

    Args:
        series: The series to shift.
        period: The period to add, which must not have components of mixed sign.

    Returns:
        The shifted series
    """
    return series.dt.offset_by(period.pl_interval)


def offset_date_times_to_series(values: Iterable[OffsetDateTime | None], name: str = "time") -> pl.Series:
    """Convert offset date-times into a Polars series of dtype ``pl.Datetime("us", "UTC")``.

    Each value is converted to its instant, so values with different offsets are directly comparable in the
    series. Nanoseconds are truncated to microseconds.

    Args:
        values: The date-times to convert. None values become nulls.
        name: The name of the series.

    Returns:
        A Polars Datetime series in UTC

    Raises:
        ArithmeticOverflowError: If an instant does not fit in a 64-bit count of microseconds.
    """
    micros = [
        None if value is None else check_long(value.to_epoch_second() * 1_000_000 + value.nano // 1_000)
        for value in values
    ]
    logger.debug("Converting %d offset date-times to Polars series '%s'", len(micros), name)
    return pl.Series(name, micros, dtype=pl.Int64).cast(pl.Datetime("us")).dt.replace_time_zone("UTC")


def series_to_offset_date_times(
    series: pl.Series, offset: ZoneOffset = ZoneOffset.UTC
) -> list[OffsetDateTime | None]:
    """Convert a Polars ``Datetime`` series into a list of OffsetDateTime at the given offset.

    A series with a time zone is read as instants; a series without one is read as UTC.

    Args:
        series: A series of dtype ``pl.Datetime``.
        offset: The offset to express the results at.

    Returns:
        The list of date-times (None for nulls)

    Raises:
        TypeError: If the series is not of dtype ``pl.Datetime``.
    """
    if not isinstance(series.dtype, pl.Datetime):
        raise TypeError(f"Expected a series of dtype Datetime, got {series.dtype}")
    nanos_per_unit = _NANOS_PER_TIME_UNIT[series.dtype.time_unit]
    results: list[OffsetDateTime | None] = []
    for count in series.dt.epoch(series.dtype.time_unit).to_list():
        if count is None:
            results.append(None)
            continue
        instant = Instant.of_epoch_second(0, count * nanos_per_unit)
        results.append(OffsetDateTime.of_instant(instant, offset))
    return results


def dates_to_numpy(dates: Iterable[LocalDate | None]) -> np.ndarray:
    """Convert dates into a NumPy array of dtype ``datetime64[D]``, with NaT for None values."""
    values = [np.datetime64("NaT", "D") if date is None else np.datetime64(date.to_epoch_day(), "D") for date in dates]
    logger.debug("Converting %d dates to a NumPy datetime64[D] array", len(values))
    return np.array(values, dtype="datetime64[D]")


def numpy_to_dates(array: np.ndarray) -> list[LocalDate | None]:
    """Convert a NumPy ``datetime64`` array into a list of LocalDate, truncating any time of day.

    Args:
        array: An array (or array-like) of ``datetime64`` values.

    Returns:
        The list of dates (None for NaT)
    """
    days = np.asarray(array).astype("datetime64[D]")
    missing = np.isnat(days)
    epoch_days = days.astype(np.int64)
    return [None if is_missing else LocalDate.of_epoch_day(int(day)) for day, is_missing in zip(epoch_days, missing)]
