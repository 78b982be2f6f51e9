from iso_calendar import LocalDate, Month


def create_dates() -> LocalDate:
    # [start_block_1]
    from iso_calendar import LocalDate

    # Create dates using the factory methods
    LocalDate.of(2024, 2, 29)
    LocalDate.of(2024, Month.FEBRUARY, 29)
    LocalDate.of_year_day(2024, 60)  # 2024-02-29
    LocalDate.of_epoch_day(0)  # 1970-01-01
    date = LocalDate.parse("2024-02-29")
    # [end_block_1]
    print(repr(date))
    return date


def date_fields() -> None:
    # [start_block_2]
    date = LocalDate.of(2024, 2, 29)

    print(date.year, date.month, date.day)  # 2024 2 29
    print(date.day_of_week)  # DayOfWeek.THURSDAY
    print(date.day_of_year)  # 60
    print(date.is_leap_year(), date.length_of_month())  # True 29
    # [end_block_2]


def month_end_clamping() -> None:
    # [start_block_3]
    # Adding months or years never produces an invalid date, the day is moved back to the end of the month
    LocalDate.of(2007, 3, 31).plus_months(1)  # 2007-04-30
    LocalDate.of(2008, 2, 29).plus_years(1)  # 2009-02-28
    LocalDate.of(2008, 2, 29).with_year(2009)  # 2009-02-28

    # Setting the day directly is checked instead
    try:
        LocalDate.of(2009, 2, 28).with_day_of_month(29)
    except ValueError as err:
        print(err)  # Invalid date 'February 29' as '2009' is not a leap year
    # [end_block_3]


def date_ranges() -> None:
    # [start_block_4]
    from iso_calendar import Period

    start = LocalDate.of(2024, 1, 31)

    # Daily dates from the start date up to (not including) the end date
    days = start.dates_until(LocalDate.of(2024, 2, 3))
    print(list(days))  # 2024-01-31, 2024-02-01, 2024-02-02

    # Monthly steps are always measured from the start date, so the end of month is kept
    months = start.dates_until(LocalDate.of(2024, 6, 1), Period.of_months(1))
    print([str(d) for d in months])  # 2024-01-31, 2024-02-29, 2024-03-31, 2024-04-30, 2024-05-31
    # [end_block_4]


def adjusters() -> None:
    # [start_block_5]
    from iso_calendar import DayOfWeek
    from iso_calendar.adjusters import last_day_of_month, next_or_same

    date = LocalDate.of(2024, 2, 10)
    print(date.with_adjuster(last_day_of_month()))  # 2024-02-29
    print(date.with_adjuster(next_or_same(DayOfWeek.MONDAY)))  # 2024-02-12
    # [end_block_5]
