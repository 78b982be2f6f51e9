import random

import pytest
from pytest import param
from pytest_benchmark.fixture import BenchmarkFixture

from iso_calendar import LocalDate, OffsetDateTime, Period
from iso_calendar.interop import dates_to_series, series_to_dates


def generate_dates(count: int) -> list[LocalDate]:
    """ Generate random dates across the range supported by a Polars Date column

    Args:
        count: Number of dates to generate

    Returns:
        List of dates
    """
    return [LocalDate.of_epoch_day(random.randint(-700_000, 3_000_000)) for _ in range(count)]


class TestEpochDayBenchmarks:
    dates: list[LocalDate]

    def test_to_epoch_day(self, benchmark: BenchmarkFixture):
        @benchmark
        def run():
            for date in self.dates:
                date.to_epoch_day()

    def test_of_epoch_day(self, benchmark: BenchmarkFixture):
        epoch_days = [date.to_epoch_day() for date in self.dates]

        @benchmark
        def run():
            for epoch_day in epoch_days:
                LocalDate.of_epoch_day(epoch_day)

    @classmethod
    def setup_class(cls):
        cls.dates = generate_dates(10_000)

    @classmethod
    def teardown_class(cls):
        cls.dates = None


class TestPeriodBenchmarks:
    @pytest.mark.parametrize("step", (
            param(Period.of_days(1), id="daily"),
            param(Period.of_weeks(1), id="weekly"),
            param(Period.of_months(1), id="monthly"),
            param(Period.of(1, 1, 1), id="mixed"),
    ))
    def test_dates_until(self, benchmark: BenchmarkFixture, step: Period):
        start = LocalDate.of(1900, 1, 31)
        end = LocalDate.of(2100, 1, 1)

        @benchmark
        def run():
            dates = list(start.dates_until(end, step))
            assert dates[0] == start

    @pytest.mark.parametrize("period", (
            param(Period.of_months(1), id="1month"),
            param(Period.of_years(1), id="1year"),
            param(Period.parse("P1Y2M3D"), id="mixed"),
    ))
    def test_add_period(self, benchmark: BenchmarkFixture, period: Period):
        dates = generate_dates(1_000)

        @benchmark
        def run():
            for date in dates:
                date.plus(period)


class TestParseBenchmarks:
    @pytest.mark.parametrize("text", (
            param("2007-12-03T10:15Z", id="utc"),
            param("2007-12-03T10:15:30.123456789+01:00", id="nanos-offset"),
    ))
    def test_parse_offset_date_time(self, benchmark: BenchmarkFixture, text: str):
        @benchmark
        def run():
            assert str(OffsetDateTime.parse(text)) == text


class TestPolarsBenchmarks:
    dates: list[LocalDate]

    def test_round_trip(self, benchmark: BenchmarkFixture):
        @benchmark
        def run():
            assert series_to_dates(dates_to_series(self.dates)) == self.dates

    @classmethod
    def setup_class(cls):
        cls.dates = generate_dates(10_000)

    @classmethod
    def teardown_class(cls):
        cls.dates = None
