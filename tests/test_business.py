from datetime import datetime, timedelta, timezone

import pytest

from bizcal.business import BusinessCalendar
from bizcal.funcs import Weekday
from bizcal.holiday import AltDay, Holiday, ObservanceType, calc_day_of_month

UTC = timezone.utc
H = timedelta(hours=1)
M = timedelta(minutes=1)


def d(y, m, day):
    return datetime(y, m, day, tzinfo=UTC)


def dt(y, m, day, h, mi):
    return datetime(y, m, day, h, mi, tzinfo=UTC)


def dts(y, m, day, h, mi, s):
    return datetime(y, m, day, h, mi, s, tzinfo=UTC)


def july4():
    return Holiday(
        type=ObservanceType.PUBLIC,
        month=7,
        day=4,
        observed=(AltDay(Weekday.SATURDAY, -1), AltDay(Weekday.SUNDAY, 1)),
        func=calc_day_of_month,
    )


def plain():
    return BusinessCalendar()


def with_holiday():
    c = BusinessCalendar()
    c.add_holiday(july4())
    return c


def _set_varying_hours(c, start_second=0, end_second=0):
    c.workday_start_func = lambda t: datetime(
        t.year, t.month, t.day, t.day % 12, 30, start_second, tzinfo=UTC
    )
    c.workday_end_func = lambda t: datetime(
        t.year, t.month, t.day, t.day % 12 + 6, 45, end_second, tzinfo=UTC
    )


def varying_hours(start_second=0, end_second=0):
    c = BusinessCalendar()
    _set_varying_hours(c, start_second, end_second)
    return c


def _make(name):
    """Build one of the calendars the table-driven tests refer to by name."""
    c = BusinessCalendar()
    if name in ("holiday", "half"):
        c.add_holiday(july4())
    if name == "half":
        c.workday_func = lambda t: 1 <= t.day <= 15
    elif name == "varying":
        _set_varying_hours(c)
    elif name == "whole":
        c.set_workday(Weekday.THURSDAY, True)
        c.set_workday(Weekday.FRIDAY, True)
        c.set_work_hours(6 * H, 24 * H)
    return c


def test_new_business_calendar_defaults():
    b = BusinessCalendar()
    assert b.workdays == {
        Weekday.MONDAY,
        Weekday.TUESDAY,
        Weekday.WEDNESDAY,
        Weekday.THURSDAY,
        Weekday.FRIDAY,
    }
    assert b.work_start == 9 * H
    assert b.work_end == 17 * H


def test_set_workday():
    b = BusinessCalendar()
    b.set_workday(Weekday.SATURDAY, True)
    b.set_workday(Weekday.WEDNESDAY, False)
    assert Weekday.SATURDAY in b.workdays
    assert Weekday.WEDNESDAY not in b.workdays


def test_set_work_hours():
    b = BusinessCalendar()
    b.set_work_hours(8 * H + 30 * M, 18 * H + 15 * M)
    assert (b.work_start, b.work_end) == (8 * H + 30 * M, 18 * H + 15 * M)
    b.set_work_hours(6 * H, 24 * H)
    assert (b.work_start, b.work_end) == (6 * H, 24 * H)


@pytest.mark.parametrize(
    "name, date, want",
    [
        ("plain", d(2020, 4, 1), True),
        ("plain", d(2020, 4, 3), True),
        ("plain", d(2020, 4, 4), False),
        ("plain", d(2020, 4, 5), False),
        ("plain", d(2020, 4, 6), True),
        ("half", d(2020, 4, 1), True),
        ("half", d(2020, 4, 3), True),
        ("half", d(2020, 4, 4), True),
        ("half", d(2020, 4, 16), False),
        ("half", d(2020, 4, 30), False),
        ("half", d(2015, 7, 3), False),
        ("half", d(2015, 7, 4), True),
        ("half", d(2016, 7, 3), True),
        ("half", d(2016, 7, 4), False),
    ],
)
def test_is_workday(name, date, want):
    assert _make(name).is_workday(date) is want


@pytest.mark.parametrize(
    "name, date, want",
    [
        ("plain", dt(2020, 4, 1, 12, 0), True),
        ("plain", dt(2020, 4, 1, 0, 0), False),
        ("plain", dt(2020, 4, 1, 18, 0), False),
        ("plain", dt(2020, 4, 5, 12, 0), False),
        ("varying", dt(2020, 4, 1, 3, 0), True),
        ("varying", dt(2020, 4, 1, 0, 0), False),
        ("varying", dt(2020, 4, 1, 7, 0), True),
        ("varying", dt(2020, 4, 1, 7, 50), False),
        ("whole", dt(2023, 10, 19, 23, 59), True),
        ("whole", dt(2023, 10, 20, 0, 0), False),
    ],
)
def test_is_work_time(name, date, want):
    assert _make(name).is_work_time(date) is want


@pytest.mark.parametrize(
    "date, want",
    [
        (dts(2020, 4, 1, 1, 30, 29), False),
        (dts(2020, 4, 1, 1, 30, 30), True),
        (dts(2020, 4, 1, 1, 30, 31), True),
        (dts(2020, 4, 1, 5, 30, 31), True),
        (dts(2020, 4, 1, 7, 45, 29), True),
        (dts(2020, 4, 1, 7, 45, 30), True),
        (dts(2020, 4, 1, 7, 45, 31), False),
    ],
)
def test_is_work_time_seconds(date, want):
    assert varying_hours(30, 30).is_work_time(date) is want


@pytest.mark.parametrize(
    "date, want",
    [
        (d(2020, 4, 1), 21),
        (d(2020, 4, 3), 19),
        (d(2020, 4, 4), 19),
        (d(2020, 4, 5), 19),
        (d(2020, 4, 6), 18),
        (d(2015, 7, 1), 21),
        (d(2015, 7, 2), 20),
        (d(2015, 7, 3), 20),
        (d(2015, 7, 4), 20),
        (d(2015, 7, 5), 20),
        (d(2015, 7, 6), 19),
    ],
)
def test_workdays_remain(date, want):
    assert with_holiday().workdays_remain(date) == want


@pytest.mark.parametrize(
    "year, month, want",
    [(2020, 4, 22), (2020, 5, 21), (2020, 6, 22), (2020, 7, 22), (2020, 11, 21)],
)
def test_workdays_in_month(year, month, want):
    assert with_holiday().workdays_in_month(year, month) == want


@pytest.mark.parametrize(
    "start, end, want",
    [
        (d(2015, 4, 1), d(2015, 4, 10), 8),
        (d(2015, 4, 1), d(2015, 4, 30), 22),
        (d(2015, 4, 1), d(2015, 5, 16), 33),
        (d(2015, 4, 1), d(2015, 4, 1), 1),
        (d(2015, 4, 4), d(2015, 4, 5), 0),
        (d(2015, 7, 1), d(2015, 7, 6), 3),
    ],
)
def test_workdays_in_range(start, end, want):
    c = with_holiday()
    assert c.workdays_in_range(start, end) == want
    if start != end:
        assert c.workdays_in_range(end, start) == -want


@pytest.mark.parametrize(
    "start, end, want",
    [
        (d(2015, 4, 4), d(2015, 4, 5), 0),
        (d(2015, 7, 1), d(2015, 7, 6), 1),
    ],
)
def test_holidays_in_range(start, end, want):
    c = with_holiday()
    assert c.holidays_in_range(start, end) == want
    assert c.holidays_in_range(end, start) == -want


@pytest.mark.parametrize(
    "year, month, n, want",
    [
        (2016, 1, 14, 20),
        (2016, 1, -5, 25),
        (2016, 1, -14, 12),
        (2016, 2, 21, 29),
        (2016, 2, 22, 0),
        (2016, 2, -1, 29),
        (2016, 2, 0, 0),
        (2016, 7, 4, 7),
    ],
)
def test_workday_n(year, month, n, want):
    assert with_holiday().workday_n(year, month, n) == want


@pytest.mark.parametrize(
    "start, offset, want",
    [
        (d(2016, 1, 5), 0, d(2016, 1, 5)),
        (d(2016, 1, 5), 1, d(2016, 1, 6)),
        (d(2016, 1, 5), -1, d(2016, 1, 4)),
        (d(2016, 1, 15), 1, d(2016, 1, 18)),
        (d(2016, 1, 15), -12, d(2015, 12, 30)),
        (d(2016, 7, 1), 1, d(2016, 7, 5)),
        (d(2016, 7, 4), 1, d(2016, 7, 5)),
        (d(2016, 7, 4), -1, d(2016, 7, 1)),
        (d(2016, 1, 1), 366, d(2017, 5, 30)),
        (d(2016, 1, 1), -366, d(2014, 8, 6)),
    ],
)
def test_workdays_from(start, offset, want):
    assert with_holiday().workdays_from(start, offset) == want


@pytest.mark.parametrize(
    "name, date, want",
    [
        ("plain", d(2020, 4, 1), 8 * H),
        ("plain", d(2020, 4, 5), timedelta(0)),
        ("varying", d(2020, 4, 1), 6 * H + 15 * M),
        ("varying", d(2020, 4, 6), 6 * H + 15 * M),
    ],
)
def test_work_hours(name, date, want):
    assert _make(name).work_hours(date) == want


@pytest.mark.parametrize(
    "name, date, want",
    [
        ("plain", d(2020, 4, 1), dt(2020, 4, 1, 9, 0)),
        ("plain", d(2020, 4, 5), None),
        ("varying", d(2020, 4, 1), dt(2020, 4, 1, 1, 30)),
        ("varying", d(2020, 4, 6), dt(2020, 4, 6, 6, 30)),
    ],
)
def test_workday_start(name, date, want):
    assert _make(name).workday_start(date) == want


@pytest.mark.parametrize(
    "name, date, want",
    [
        ("plain", d(2020, 4, 1), dt(2020, 4, 1, 17, 0)),
        ("plain", d(2020, 4, 5), None),
        ("varying", d(2020, 4, 1), dt(2020, 4, 1, 7, 45)),
        ("varying", d(2020, 4, 6), dt(2020, 4, 6, 12, 45)),
    ],
)
def test_workday_end(name, date, want):
    assert _make(name).workday_end(date) == want


@pytest.mark.parametrize(
    "name, date, want",
    [
        ("plain", dt(2020, 4, 1, 6, 0), dt(2020, 4, 1, 9, 0)),
        ("plain", dt(2020, 4, 1, 20, 0), dt(2020, 4, 2, 9, 0)),
        ("plain", dt(2020, 4, 4, 12, 0), dt(2020, 4, 6, 9, 0)),
        ("plain", dt(2020, 4, 5, 12, 0), dt(2020, 4, 6, 9, 0)),
        ("varying", dt(2020, 4, 1, 3, 0), dt(2020, 4, 2, 2, 30)),
        ("varying", dt(2020, 4, 6, 8, 0), dt(2020, 4, 7, 7, 30)),
    ],
)
def test_next_workday_start(name, date, want):
    assert _make(name).next_workday_start(date) == want


@pytest.mark.parametrize(
    "name, date, want",
    [
        ("plain", dt(2020, 4, 1, 6, 0), dt(2020, 4, 1, 17, 0)),
        ("plain", dt(2020, 4, 1, 20, 0), dt(2020, 4, 2, 17, 0)),
        ("plain", dt(2020, 4, 4, 12, 0), dt(2020, 4, 6, 17, 0)),
        ("plain", dt(2020, 4, 5, 12, 0), dt(2020, 4, 6, 17, 0)),
        ("varying", dt(2020, 4, 1, 3, 0), dt(2020, 4, 1, 7, 45)),
        ("varying", dt(2020, 4, 6, 8, 0), dt(2020, 4, 6, 12, 45)),
        ("varying", dt(2020, 4, 6, 22, 0), dt(2020, 4, 7, 13, 45)),
    ],
)
def test_next_workday_end(name, date, want):
    assert _make(name).next_workday_end(date) == want


@pytest.mark.parametrize(
    "name, start, end, want",
    [
        ("plain", dt(2020, 4, 1, 6, 0), dt(2020, 4, 1, 23, 0), 8 * H),
        ("plain", dt(2020, 4, 1, 18, 0), dt(2020, 4, 2, 12, 0), 3 * H),
        ("plain", dt(2020, 4, 1, 14, 0), dt(2020, 4, 1, 18, 0), 3 * H),
        ("plain", dt(2020, 4, 1, 9, 15), dt(2020, 4, 2, 12, 0), 10 * H + 45 * M),
        ("plain", dt(2020, 4, 4, 9, 0), dt(2020, 4, 6, 8, 0), timedelta(0)),
        ("varying", dt(2020, 4, 1, 1, 0), dt(2020, 4, 2, 5, 0), 8 * H + 45 * M),
        ("varying", dt(2020, 4, 13, 0, 0), dt(2020, 4, 18, 0, 0), 5 * 6 * H + 5 * 15 * M),
    ],
)
def test_work_hours_in_range(name, start, end, want):
    c = _make(name)
    assert c.work_hours_in_range(start, end) == want
    assert c.work_hours_in_range(end, start) == want


@pytest.mark.parametrize(
    "name, date, worked, want",
    [
        ("plain", dt(2020, 4, 1, 6, 0), 8 * H, dt(2020, 4, 1, 17, 0)),
        ("plain", dt(2020, 4, 1, 18, 0), 3 * H, dt(2020, 4, 2, 12, 0)),
        ("plain", dt(2020, 4, 1, 12, 0), 3 * H + 20 * M, dt(2020, 4, 1, 15, 20)),
        ("plain", dt(2020, 4, 1, 9, 15), 10 * H + 45 * M, dt(2020, 4, 2, 12, 0)),
        ("plain", dt(2020, 4, 4, 9, 0), timedelta(0), dt(2020, 4, 4, 9, 0)),
        ("plain", dt(2020, 4, 4, 9, 0), 24 * H, dt(2020, 4, 8, 17, 0)),
        ("varying", dt(2020, 4, 1, 1, 0), 8 * H + 45 * M, dt(2020, 4, 2, 5, 0)),
        ("varying", dt(2020, 4, 13, 0, 0), 5 * 6 * H + 5 * 15 * M, dt(2020, 4, 17, 11, 45)),
    ],
)
def test_add_work_hours(name, date, worked, want):
    assert _make(name).add_work_hours(date, worked) == want


def test_add_work_hours_round_trips_with_range():
    c = plain()
    start = dt(2020, 4, 1, 10, 0)
    finish = c.add_work_hours(start, 13 * H)
    assert c.work_hours_in_range(start, finish) == 13 * H