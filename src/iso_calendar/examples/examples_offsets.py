from iso_calendar import OffsetDateTime, ZoneOffset
from iso_calendar.examples.utils import suppress_output


def create_offset_date_time() -> OffsetDateTime:
    # [start_block_1]
    from iso_calendar import OffsetDateTime, ZoneOffset

    ZoneOffset.of("+05:30")
    ZoneOffset.of_hours(-8)
    odt = OffsetDateTime.parse("2007-12-03T10:15:30+01:00")
    # [end_block_1]
    print(repr(odt))
    return odt


def change_offsets() -> None:
    with suppress_output():
        odt = create_offset_date_time()

    # [start_block_2]
    # Keep the local date-time, so the instant moves
    print(odt.with_offset_same_local(ZoneOffset.UTC))  # 2007-12-03T10:15:30Z

    # Keep the instant, so the local date-time moves
    print(odt.with_offset_same_instant(ZoneOffset.UTC))  # 2007-12-03T09:15:30Z
    # [end_block_2]


def compare_instants() -> None:
    # [start_block_3]
    a = OffsetDateTime.parse("2008-12-03T11:00+01:00")
    b = OffsetDateTime.parse("2008-12-03T10:00Z")

    print(a.is_equal(b))  # True, the same instant
    print(a == b)  # False, the local date-times and offsets differ
    print(sorted([a, b]))  # b sorts first, by local date-time when the instants are equal
    # [end_block_3]


def standard_library_conversion() -> None:
    # [start_block_4]
    import datetime as dt

    value = dt.datetime(2024, 6, 1, 12, 30, tzinfo=dt.timezone(dt.timedelta(hours=2)))
    odt = OffsetDateTime.of_datetime(value)
    print(odt)  # 2024-06-01T12:30+02:00
    print(odt.to_datetime() == value)  # True
    # [end_block_4]
