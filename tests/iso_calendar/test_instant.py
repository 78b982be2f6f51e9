import unittest

from parameterized import parameterized

from iso_calendar.exceptions import FieldRangeError, UnsupportedFieldError
from iso_calendar.fields import ChronoField
from iso_calendar.instant import MAX_SECOND, MIN_SECOND, Instant


class TestInstantFactories(unittest.TestCase):
    @parameterized.expand([
        ("negative_adjustment", 0, -1, -1, 999_999_999),
        ("carry_adjustment", 3, 1_500_000_000, 4, 500_000_000),
        ("plain", 1_000, 0, 1_000, 0),
    ])
    def test_of_epoch_second(self, _, seconds, adjustment, expected_seconds, expected_nano):
        instant = Instant.of_epoch_second(seconds, adjustment)
        self.assertEqual((instant.epoch_second, instant.nano), (expected_seconds, expected_nano))

    def test_epoch_is_shared(self):
        self.assertIs(Instant.of_epoch_second(0), Instant.EPOCH)
        self.assertIs(Instant.of_epoch_milli(0), Instant.EPOCH)

    @parameterized.expand([
        ("negative", -1, -1, 999_000_000),
        ("positive", 1_500, 1, 500_000_000),
    ])
    def test_of_epoch_milli(self, _, millis, expected_seconds, expected_nano):
        instant = Instant.of_epoch_milli(millis)
        self.assertEqual((instant.epoch_second, instant.nano), (expected_seconds, expected_nano))
        self.assertEqual(instant.to_epoch_milli(), millis)

    def test_limits(self):
        self.assertEqual(Instant.of_epoch_second(MAX_SECOND, 999_999_999), Instant.MAX)
        self.assertEqual(Instant.of_epoch_second(MIN_SECOND), Instant.MIN)
        with self.assertRaises(FieldRangeError):
            Instant.of_epoch_second(MAX_SECOND + 1)
        with self.assertRaises(FieldRangeError):
            Instant.of_epoch_second(MIN_SECOND, -1)


class TestInstantBehaviour(unittest.TestCase):
    @parameterized.expand([
        ("epoch", Instant.EPOCH, "1970-01-01T00:00:00Z"),
        ("billennium", Instant.of_epoch_second(1_000_000_000), "2001-09-09T01:46:40Z"),
        ("fraction", Instant.of_epoch_second(1_000_000_000, 500_000_000), "2001-09-09T01:46:40.500Z"),
        ("before_epoch", Instant.of_epoch_second(-1), "1969-12-31T23:59:59Z"),
    ])
    def test_str(self, _, instant, expected):
        self.assertEqual(str(instant), expected)

    def test_repr(self):
        self.assertEqual(repr(Instant.EPOCH), "Instant('1970-01-01T00:00:00Z')")

    def test_arithmetic(self):
        self.assertEqual(Instant.EPOCH.plus_millis(-1), Instant.of_epoch_second(-1, 999_000_000))
        self.assertEqual(Instant.EPOCH.plus_nanos(1_000_000_001), Instant.of_epoch_second(1, 1))
        self.assertEqual(Instant.EPOCH.minus_seconds(60), Instant.of_epoch_second(-60))
        self.assertIs(Instant.EPOCH.plus_seconds(0), Instant.EPOCH)

    def test_fields(self):
        instant = Instant.of_epoch_second(10, 123_456_789)
        self.assertEqual(instant.get_long(ChronoField.INSTANT_SECONDS), 10)
        self.assertEqual(instant.get_long(ChronoField.MILLI_OF_SECOND), 123)
        self.assertEqual(instant.get_long(ChronoField.MICRO_OF_SECOND), 123_456)
        self.assertFalse(instant.is_supported(ChronoField.DAY_OF_MONTH))
        with self.assertRaises(UnsupportedFieldError):
            instant.get_long(ChronoField.DAY_OF_MONTH)

    def test_ordering(self):
        early = Instant.of_epoch_second(-1, 999_999_999)
        late = Instant.of_epoch_second(0, 1)
        self.assertEqual(sorted([late, Instant.EPOCH, early]), [early, Instant.EPOCH, late])
        self.assertTrue(late.is_after(early))
        self.assertTrue(early.is_before(Instant.EPOCH))
        with self.assertRaises(TypeError):
            _ = Instant.EPOCH < 0  # noqa - expecting type error
        self.assertEqual(hash(Instant.of_epoch_second(5)), hash(Instant.of_epoch_milli(5_000)))
