import datetime as dt
import unittest

from parameterized import parameterized

from iso_calendar.enums import ChronoUnit
from iso_calendar.exceptions import DateTimeParseError, FieldRangeError, OffsetError, UnsupportedFieldError
from iso_calendar.fields import ChronoField
from iso_calendar.instant import Instant
from iso_calendar.local_date import LocalDate
from iso_calendar.local_date_time import LocalDateTime
from iso_calendar.local_time import LocalTime
from iso_calendar.offset_date_time import OffsetDateTime
from iso_calendar.period import Period
from iso_calendar.zone_offset import ZoneOffset

PLUS_ONE = ZoneOffset.of_hours(1)


class TestOffsetDateTimeText(unittest.TestCase):
    @parameterized.expand([
        ("offset", "2007-12-03T10:15:30+01:00"),
        ("utc", "2007-12-03T10:15Z"),
        ("negative_offset", "2007-12-03T10:15:30.500-05:30"),
        ("offset_seconds", "2007-12-03T10:15+01:00:30"),
        ("min", "-999999999-01-01T00:00+18:00"),
    ])
    def test_round_trip(self, _, text):
        self.assertEqual(str(OffsetDateTime.parse(text)), text)

    def test_lower_case_utc(self):
        self.assertEqual(OffsetDateTime.parse("2007-12-03t10:15z").offset, ZoneOffset.UTC)

    def test_offset_out_of_range(self):
        with self.assertRaises(DateTimeParseError) as context:
            OffsetDateTime.parse("2007-12-03T10:15:30+19:00")
        self.assertEqual(context.exception.error_index, 19)

    @parameterized.expand([
        ("no_offset", "2007-12-03T10:15:30", 19),
        ("invalid_date", "2007-02-30T10:15:30Z", 8),
        ("short_offset", "2007-12-03T10:15:30+1", 19),
        ("letter_in_hour", "2024-01-01T1x:00Z", 11),
        ("trailing_newline", "2024-01-01T10:00+01:00\n", 22),
        ("arabic_indic_fraction", "2024-01-01T10:00:00.\u0661\u0662\u0663Z", 19),
    ])
    def test_parse_invalid(self, _, text, error_index):
        with self.assertRaises(DateTimeParseError) as err:
            OffsetDateTime.parse(text)
        self.assertEqual(err.exception.error_index, error_index)

    def test_min_max(self):
        self.assertEqual(str(OffsetDateTime.MIN), "-999999999-01-01T00:00+18:00")
        self.assertEqual(str(OffsetDateTime.MAX), "+999999999-12-31T23:59:59.999999999-18:00")

    def test_repr(self):
        self.assertEqual(
            repr(OffsetDateTime.of_fields(2007, 12, 3, 10, 15, 0, 0, PLUS_ONE)),
            "OffsetDateTime('2007-12-03T10:15+01:00')",
        )


class TestOffsetDateTimeConversion(unittest.TestCase):
    value = OffsetDateTime.parse("2007-12-03T10:15:30+01:00")

    def test_to_epoch_second(self):
        expected = int(dt.datetime(2007, 12, 3, 9, 15, 30, tzinfo=dt.timezone.utc).timestamp())
        self.assertEqual(self.value.to_epoch_second(), expected)
        self.assertEqual(self.value.to_instant(), Instant.of_epoch_second(expected))

    def test_of_instant(self):
        self.assertEqual(
            str(OffsetDateTime.of_instant(Instant.EPOCH, ZoneOffset.of_hours(-1))), "1969-12-31T23:00-01:00"
        )

    def test_with_offset_same_instant(self):
        self.assertEqual(str(self.value.with_offset_same_instant(ZoneOffset.UTC)), "2007-12-03T09:15:30Z")
        self.assertEqual(
            str(self.value.with_offset_same_instant(ZoneOffset.of_hours(-18))), "2007-12-02T15:15:30-18:00"
        )
        self.assertIs(self.value.with_offset_same_instant(PLUS_ONE), self.value)

    def test_with_offset_same_local(self):
        moved = self.value.with_offset_same_local(ZoneOffset.UTC)
        self.assertEqual(str(moved), "2007-12-03T10:15:30Z")
        self.assertEqual(moved.to_epoch_second() - self.value.to_epoch_second(), 3_600)

    def test_datetime_round_trip(self):
        value = dt.datetime(2024, 6, 1, 12, 30, 0, 250, tzinfo=dt.timezone(dt.timedelta(hours=2)))
        converted = OffsetDateTime.of_datetime(value)
        self.assertEqual(str(converted), "2024-06-01T12:30:00.000250+02:00")
        self.assertEqual(converted.to_datetime(), value)
        self.assertEqual(OffsetDateTime.from_temporal(value), converted)

    def test_of_datetime_negative_offset(self):
        value = dt.datetime(2024, 6, 1, 12, 30, tzinfo=dt.timezone(dt.timedelta(hours=-5)))
        self.assertEqual(OffsetDateTime.of_datetime(value).offset, ZoneOffset.of_hours(-5))

    @parameterized.expand([
        ("naive", dt.datetime(2024, 6, 1, 12, 30)),
        ("sub_second_offset", dt.datetime(2024, 6, 1, tzinfo=dt.timezone(dt.timedelta(microseconds=1)))),
    ])
    def test_of_datetime_invalid(self, _, value):
        with self.assertRaises(OffsetError):
            OffsetDateTime.of_datetime(value)

    def test_to_datetime_out_of_range(self):
        with self.assertRaises(FieldRangeError):
            OffsetDateTime.of_fields(0, 1, 1, 0, 0, 0, 0, ZoneOffset.UTC).to_datetime()

    def test_from_temporal_unsupported(self):
        with self.assertRaises(UnsupportedFieldError):
            OffsetDateTime.from_temporal(LocalDate.EPOCH)


class TestOffsetDateTimeFields(unittest.TestCase):
    value = OffsetDateTime.parse("2007-12-03T10:15:30+01:00")

    def test_get(self):
        self.assertEqual(self.value.get(ChronoField.OFFSET_SECONDS), 3_600)
        self.assertEqual(self.value.get(ChronoField.HOUR_OF_DAY), 10)
        self.assertEqual(self.value.get_long(ChronoField.INSTANT_SECONDS), self.value.to_epoch_second())
        with self.assertRaises(UnsupportedFieldError):
            self.value.get(ChronoField.INSTANT_SECONDS)

    def test_with_instant_seconds_keeps_offset(self):
        self.assertEqual(str(self.value.with_field(ChronoField.INSTANT_SECONDS, 0)), "1970-01-01T01:00+01:00")

    def test_with_offset_seconds_keeps_local(self):
        self.assertEqual(str(self.value.with_field(ChronoField.OFFSET_SECONDS, 0)), "2007-12-03T10:15:30Z")

    @parameterized.expand([
        ("date", LocalDate.of(2020, 1, 1), "2020-01-01T10:15:30+01:00"),
        ("time", LocalTime.NOON, "2007-12-03T12:00+01:00"),
        ("offset", ZoneOffset.UTC, "2007-12-03T10:15:30Z"),
        ("instant", Instant.EPOCH, "1970-01-01T01:00+01:00"),
    ])
    def test_with_adjuster(self, _, adjuster, expected):
        self.assertEqual(str(self.value.with_adjuster(adjuster)), expected)

    def test_with_adjuster_replaces_with_other_date_time(self):
        other = OffsetDateTime.parse("2020-01-01T00:00Z")
        self.assertIs(self.value.with_adjuster(other), other)


class TestOffsetDateTimeArithmetic(unittest.TestCase):
    def test_plus_keeps_offset(self):
        value = OffsetDateTime.parse("2024-01-31T23:30+01:00")
        self.assertEqual(str(value.plus_hours(1)), "2024-02-01T00:30+01:00")
        self.assertEqual(str(value.plus(1, ChronoUnit.MONTHS)), "2024-02-29T23:30+01:00")
        self.assertEqual(str(value + Period.of_months(1)), "2024-02-29T23:30+01:00")
        self.assertEqual(str(value - Period.of_days(31)), "2023-12-31T23:30+01:00")

    def test_until_converts_offset(self):
        start = OffsetDateTime.parse("2024-01-01T00:00+01:00")
        end = OffsetDateTime.parse("2024-01-01T00:00Z")
        self.assertEqual(start.until(end, ChronoUnit.HOURS), 1)
        self.assertEqual(end.until(start, ChronoUnit.MINUTES), -60)


class TestOffsetDateTimeComparison(unittest.TestCase):
    plus_one = OffsetDateTime.parse("2008-12-03T11:00+01:00")
    utc = OffsetDateTime.parse("2008-12-03T10:00Z")

    def test_same_instant_is_not_equal(self):
        self.assertTrue(self.plus_one.is_equal(self.utc))
        self.assertNotEqual(self.plus_one, self.utc)
        self.assertFalse(self.plus_one.is_after(self.utc))
        self.assertFalse(self.plus_one.is_before(self.utc))

    def test_same_instant_ordered_by_local_date_time(self):
        self.assertGreater(self.plus_one.compare_to(self.utc), 0)
        self.assertEqual(sorted([self.plus_one, self.utc]), [self.utc, self.plus_one])

    def test_ordered_by_instant(self):
        later = OffsetDateTime.parse("2008-12-03T10:30Z")
        self.assertTrue(self.plus_one.is_before(later))
        self.assertLess(self.plus_one, later)
        self.assertEqual(self.plus_one.timeline_order(), self.utc.timeline_order())

    def test_ordering_against_other_types(self):
        with self.assertRaises(TypeError):
            _ = self.utc < self.utc.to_local_date_time()  # noqa - expecting type error
        with self.assertRaises(TypeError):
            _ = self.utc >= self.utc.to_instant()  # noqa - expecting type error
        with self.assertRaises(TypeError):
            _ = self.utc > "2008-12-03T10:00Z"  # noqa - expecting type error

    def test_hash(self):
        same = OffsetDateTime.of(LocalDate.of(2008, 12, 3), LocalTime.of(10, 0), ZoneOffset.UTC)
        self.assertEqual(hash(self.utc), hash(same))

    def test_from_local_date_time(self):
        local = LocalDateTime.of_fields(2008, 12, 3, 10)
        self.assertEqual(OffsetDateTime.of_local(local, ZoneOffset.UTC), self.utc)
