from iso_calendar import LocalDate, Period
from iso_calendar.examples.utils import get_example_df, suppress_output


def simple_factory_methods() -> None:
    # [start_block_1]
    from iso_calendar import Period

    # Create periods using specific methods
    Period.of_years(1)
    Period.of_months(3)
    Period.of_weeks(2)  # P14D
    Period.of_days(1)
    Period.of(1, 2, 3)  # P1Y2M3D
    # [end_block_1]


def iso_factory_methods() -> None:
    # [start_block_2]
    # Using ISO 8601 period strings
    Period.parse("P1Y")
    Period.parse("P3M")
    Period.parse("P1Y2M3W4D")  # P1Y2M25D
    Period.parse("-P1Y2M")  # P-1Y-2M
    # [end_block_2]


def periods_between_dates() -> Period:
    # [start_block_3]
    start = LocalDate.of(2010, 1, 15)
    end = LocalDate.of(2011, 3, 18)

    period = Period.between(start, end)
    print(period)  # P1Y2M3D
    # [end_block_3]
    return period


def adding_periods() -> None:
    # [start_block_4]
    # The years and months are added as one step, then the days
    print(LocalDate.of(2008, 1, 31) + Period.of(1, 1, 1))  # 2009-03-01

    # Periods are not normalised unless asked
    p = Period.of_months(10) + Period.of_months(5)
    print(p, p.normalized())  # P15M P1Y3M
    # [end_block_4]


def polars_intervals() -> None:
    # [start_block_5]
    import polars as pl

    from iso_calendar.interop import dates_to_series, offset_by_period

    series = dates_to_series([LocalDate.of(2024, 1, 31), LocalDate.of(2024, 3, 31)])
    shifted = offset_by_period(series, Period.of_months(1))
    with pl.Config(tbl_rows=4):
        print(shifted)  # 2024-02-29, 2024-04-30
    # [end_block_5]


def shift_month_end_readings() -> None:
    with suppress_output():
        df = get_example_df()

    # [start_block_6]
    import polars as pl

    from iso_calendar.interop import series_to_dates

    # Move each reading forward a quarter with Polars; month ends clamp the same way as Period arithmetic
    quarter = Period.of_months(3)
    shifted = df.with_columns(pl.col("date").dt.offset_by(quarter.pl_interval).alias("reported"))
    reported = series_to_dates(shifted["reported"])
    print(reported == [d + quarter for d in series_to_dates(df["date"])])  # True
    print(reported[1])  # 2024-05-29, from 2024-02-29
    # [end_block_6]
