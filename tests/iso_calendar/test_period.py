"""
Unit tests for the period module
"""

import pytest

from iso_calendar.enums import ChronoUnit
from iso_calendar.exceptions import ArithmeticOverflowError, DateTimeParseError, UnsupportedUnitError
from iso_calendar.fields import INT_MAX, INT_MIN
from iso_calendar.local_date import LocalDate
from iso_calendar.local_date_time import LocalDateTime
from iso_calendar.period import Period


class TestFactories:
    """Unit tests for the Period factory methods."""

    @pytest.mark.parametrize(
        "period,expected",
        [
            (Period.of_years(2), (2, 0, 0)),
            (Period.of_months(-3), (0, -3, 0)),
            (Period.of_weeks(2), (0, 0, 14)),
            (Period.of_days(5), (0, 0, 5)),
            (Period.of(1, 2, 3), (1, 2, 3)),
        ],
        ids=["years", "months", "weeks", "days", "all"],
    )
    def test_components(self, period: Period, expected: tuple[int, int, int]) -> None:
        """Test that each factory sets the expected components."""
        assert (period.years, period.months, period.days) == expected

    def test_zero_is_shared(self) -> None:
        """Test that an empty period is always the ZERO constant."""
        assert Period.of(0, 0, 0) is Period.ZERO
        assert Period.of_weeks(0) is Period.ZERO
        assert Period.parse("P0D") is Period.ZERO

    @pytest.mark.parametrize("value", [INT_MAX + 1, INT_MIN - 1])
    def test_of_overflow(self, value: int) -> None:
        with pytest.raises(ArithmeticOverflowError):
            Period.of_days(value)

    def test_of_weeks_overflow(self) -> None:
        with pytest.raises(ArithmeticOverflowError):
            Period.of_weeks(INT_MAX // 7 + 1)

    def test_from_amount(self) -> None:
        period = Period.of(1, 2, 3)
        assert Period.from_amount(period) is period

        class Amount:
            units = (ChronoUnit.DAYS, ChronoUnit.YEARS)

            @staticmethod
            def get(unit: ChronoUnit) -> int:
                return 4 if unit == ChronoUnit.DAYS else 1

        assert Period.from_amount(Amount()) == Period.of(1, 0, 4)

    def test_from_amount_unsupported_unit(self) -> None:
        class Amount:
            units = (ChronoUnit.HOURS,)

            @staticmethod
            def get(unit: ChronoUnit) -> int:
                return 1

        with pytest.raises(UnsupportedUnitError):
            Period.from_amount(Amount())


class TestParse:
    """Unit tests for Period.parse."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("P2Y", Period.of_years(2)),
            ("P3M", Period.of_months(3)),
            ("P4W", Period.of_weeks(4)),
            ("P5D", Period.of_days(5)),
            ("P1Y2M3D", Period.of(1, 2, 3)),
            ("P1Y2M3W4D", Period.of(1, 2, 25)),
            ("P-1Y2M", Period.of(-1, 2, 0)),
            ("-P1Y2M", Period.of(-1, -2, 0)),
            ("-P-1Y+2M", Period.of(1, -2, 0)),
            ("+P1D", Period.of_days(1)),
            ("p1y2m3d", Period.of(1, 2, 3)),
            ("P-2W3D", Period.of_days(-11)),
        ],
    )
    def test_parse(self, text: str, expected: Period) -> None:
        assert Period.parse(text) == expected

    @pytest.mark.parametrize(
        "text",
        [
            "P", "-P", "PT1H", "P1D2Y", "P1.5D", "1Y", "P1Y ", "P1Y\n", "P\u0661D", "", f"P{INT_MAX + 1}D",
            f"P{INT_MAX // 7 + 1}W",
        ],
        ids=[
            "empty P", "signed empty", "time", "wrong order", "fraction", "no P", "trailing", "newline",
            "arabic-indic digit", "blank", "int", "week",
        ],
    )
    def test_parse_invalid(self, text: str) -> None:
        with pytest.raises(DateTimeParseError) as err:
            Period.parse(text)
        assert str(err.value) == "Text cannot be parsed to a Period"
        assert err.value.parsed_text == text

    @pytest.mark.parametrize(
        "period,text",
        [
            (Period.ZERO, "P0D"),
            (Period.of(1, 2, 3), "P1Y2M3D"),
            (Period.of(1, -2, 3), "P1Y-2M3D"),
            (Period.of_months(14), "P14M"),
            (Period.of_days(-7), "P-7D"),
        ],
    )
    def test_str_round_trip(self, period: Period, text: str) -> None:
        assert str(period) == text
        assert Period.parse(text) == period

    def test_repr(self) -> None:
        assert repr(Period.of(1, 2, 3)) == "Period('P1Y2M3D')"


class TestAccessors:
    """Unit tests for the Period accessors."""

    def test_units(self) -> None:
        period = Period.of(1, 2, 3)
        assert period.units == (ChronoUnit.YEARS, ChronoUnit.MONTHS, ChronoUnit.DAYS)
        assert [period.get(unit) for unit in period.units] == [1, 2, 3]
        with pytest.raises(UnsupportedUnitError):
            period.get(ChronoUnit.WEEKS)

    @pytest.mark.parametrize(
        "period,is_zero,is_negative",
        [
            (Period.ZERO, True, False),
            (Period.of_days(1), False, False),
            (Period.of(1, -1, 0), False, True),
            (Period.of_years(-1), False, True),
        ],
    )
    def test_zero_and_negative(self, period: Period, is_zero: bool, is_negative: bool) -> None:
        assert period.is_zero() == is_zero
        assert bool(period) is not is_zero
        assert period.is_negative() == is_negative

    def test_to_total_months(self) -> None:
        assert Period.of(1, 2, 30).to_total_months() == 14
        assert Period.of(-1, 2, 0).to_total_months() == -10

    @pytest.mark.parametrize(
        "period,expected",
        [
            (Period.ZERO, "0d"),
            (Period.of(1, 2, 3), "1y2mo3d"),
            (Period.of_months(1), "1mo"),
            (Period.of_weeks(1), "7d"),
            (Period.of(-1, -2, 0), "-1y2mo"),
            (Period.of_days(-3), "-3d"),
        ],
    )
    def test_pl_interval(self, period: Period, expected: str) -> None:
        """Test the Polars duration string of a period."""
        assert period.pl_interval == expected

    def test_pl_interval_mixed_signs(self) -> None:
        with pytest.raises(ValueError):
            _ = Period.of(1, -1, 0).pl_interval


class TestModification:
    """Unit tests for the Period modification methods."""

    def test_with(self) -> None:
        period = Period.of(1, 2, 3)
        assert period.with_years(5) == Period.of(5, 2, 3)
        assert period.with_months(0) == Period.of(1, 0, 3)
        assert period.with_days(-3) == Period.of(1, 2, -3)
        assert period.with_years(1) is period
        assert Period.of_years(1).with_years(0) is Period.ZERO

    def test_plus_and_minus(self) -> None:
        assert Period.of(1, 6, 0) + Period.of(1, 8, 3) == Period.of(2, 14, 3)
        assert Period.of(1, 6, 0) - Period.of(1, 8, 3) == Period.of(0, -2, -3)
        assert Period.of(1, 6, 0).plus_years(1).plus_months(1).plus_days(1) == Period.of(2, 7, 1)
        assert Period.of(1, 6, 0).minus_years(1).minus_months(1).minus_days(1) == Period.of(0, 5, -1)

    def test_plus_zero_is_identity(self) -> None:
        period = Period.of(1, 2, 3)
        assert period.plus_years(0) is period
        assert period.plus_months(0) is period
        assert period.minus_days(0) is period

    def test_plus_overflow(self) -> None:
        with pytest.raises(ArithmeticOverflowError):
            Period.of_days(INT_MAX).plus_days(1)
        with pytest.raises(ArithmeticOverflowError):
            Period.of_days(INT_MAX) + Period.of_days(1)
        with pytest.raises(ArithmeticOverflowError):
            Period.of_years(INT_MIN).minus_years(1)

    def test_multiplied_by(self) -> None:
        period = Period.of(1, 2, 3)
        assert period * 3 == Period.of(3, 6, 9)
        assert 3 * period == Period.of(3, 6, 9)
        assert period.multiplied_by(1) is period
        assert Period.ZERO.multiplied_by(5) is Period.ZERO
        assert period.multiplied_by(0) is Period.ZERO
        with pytest.raises(ArithmeticOverflowError):
            Period.of_days(INT_MAX).multiplied_by(2)

    def test_negated(self) -> None:
        assert -Period.of(1, -2, 3) == Period.of(-1, 2, -3)
        with pytest.raises(ArithmeticOverflowError):
            Period.of_days(INT_MIN).negated()

    @pytest.mark.parametrize(
        "period,expected",
        [
            (Period.of_months(15), Period.of(1, 3, 0)),
            (Period.of(1, -25, 0), Period.of(-1, -1, 0)),
            (Period.of(-1, 25, 5), Period.of(1, 1, 5)),
            (Period.of_months(-12), Period.of_years(-1)),
        ],
    )
    def test_normalized(self, period: Period, expected: Period) -> None:
        assert period.normalized() == expected

    def test_normalized_unchanged_is_identity(self) -> None:
        period = Period.of(1, 11, 40)
        assert period.normalized() is period

    def test_equality(self) -> None:
        """Test that periods are compared component by component, without normalising."""
        assert Period.of_years(1) != Period.of_months(12)
        assert Period.of_weeks(1) == Period.of_days(7)
        assert len({Period.of(1, 2, 3), Period.parse("P1Y2M3D")}) == 1


class TestApplication:
    """Unit tests for adding a period to, and subtracting it from, temporal objects."""

    @pytest.mark.parametrize(
        "start,period,expected",
        [
            (LocalDate.of(2008, 1, 31), Period.of(1, 1, 1), LocalDate.of(2009, 3, 1)),
            (LocalDate.of(2008, 2, 29), Period.of_years(1), LocalDate.of(2009, 2, 28)),
            (LocalDate.of(2008, 1, 31), Period.of(0, 1, -1), LocalDate.of(2008, 2, 28)),
            (LocalDate.of(2008, 1, 31), Period.of(1, -12, 0), LocalDate.of(2008, 1, 31)),
            (LocalDate.of(2008, 1, 31), Period.ZERO, LocalDate.of(2008, 1, 31)),
        ],
        ids=["months then days", "years only", "negative days", "cancelling", "zero"],
    )
    def test_add_to(self, start: LocalDate, period: Period, expected: LocalDate) -> None:
        assert period.add_to(start) == expected
        assert start.plus(period) == expected

    def test_subtract_from(self) -> None:
        assert Period.of(1, 1, 1).subtract_from(LocalDate.of(2009, 3, 1)) == LocalDate.of(2008, 1, 31)
        assert LocalDate.of(2009, 3, 31).minus(Period.of_months(1)) == LocalDate.of(2009, 2, 28)

    def test_add_to_date_time(self) -> None:
        start = LocalDateTime.of_fields(2024, 1, 31, 10, 30)
        assert start + Period.of(0, 1, 1) == LocalDateTime.of_fields(2024, 3, 1, 10, 30)

    def test_between(self) -> None:
        assert Period.between(LocalDate.of(2010, 1, 15), LocalDate.of(2011, 3, 18)) == Period.of(1, 2, 3)
