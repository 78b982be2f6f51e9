import contextlib
import io
import random
from typing import Iterator

import polars as pl

from iso_calendar import LocalDate, Period
from iso_calendar.interop import date_range_series


@contextlib.contextmanager
def suppress_output() -> Iterator:
    with contextlib.redirect_stdout(io.StringIO()):
        yield


def get_example_df(months: int = 12) -> pl.DataFrame:
    # Sample data: one reading at the end of each month of 2024, with random rainfall totals
    random.seed(31)
    start = LocalDate.of(2024, 1, 31)
    dates = date_range_series(start, start.plus_months(months), Period.of_months(1))
    df = pl.DataFrame({"date": dates, "rainfall": [round(random.uniform(20, 120), 1) for _ in range(len(dates))]})

    with pl.Config(tbl_rows=months):
        print(df)

    return df
