"""Date helpers: weekday arithmetic, day and month boundaries, Julian dates."""

from __future__ import annotations

import calendar as _stdcal
from datetime import datetime, timedelta, timezone, tzinfo
from enum import IntEnum

# Time zone used by functions that build dates from a year and month.
# None means naive datetimes in local time.
DEFAULT_LOC: tzinfo | None = None


class Weekday(IntEnum):
    """Day of the week, numbered from Sunday."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def of(cls, t: datetime) -> Weekday:
        """Return the weekday of the given datetime."""
        return cls((t.weekday() + 1) % 7)


def _days_in_month(year: int, month: int) -> int:
    return _stdcal.monthrange(year, month)[1]


def is_weekend(t: datetime) -> bool:
    """Report whether the given time falls on a Saturday or Sunday."""
    return Weekday.of(t) in (Weekday.SATURDAY, Weekday.SUNDAY)


def weekday_n_from(t: datetime, day: int, n: int) -> datetime | None:
    """Return the nth occurrence of a weekday counting from t.

    Positive n counts forwards, negative n backwards; t itself counts as an
    occurrence. For n == 0 the result is None. The time of day is kept.
    """
    if n == 0:
        return None
    if n < 0:
        n += 1

    wd = Weekday.of(t)
    if day < wd:
        return t + timedelta(days=(7 - (wd - day)) + (n - 1) * 7)
    if day > wd:
        return t + timedelta(days=(day - wd) + (n - 1) * 7)
    if n <= 0:
        n += 1
    return t + timedelta(days=(n - 1) * 7)


def weekday_n(year: int, month: int, day: int, n: int) -> datetime | None:
    """Return the nth occurrence of a weekday in the given month.

    Counting continues into neighbouring months if n exceeds the number of
    occurrences. Results are at noon in DEFAULT_LOC; n == 0 gives None.
    """
    if n > 0:
        start = datetime(year, month, 1, 12, tzinfo=DEFAULT_LOC)
        return weekday_n_from(start, day, n)
    if n == 0:
        return None
    last = datetime(year, month, _days_in_month(year, month), 12, tzinfo=DEFAULT_LOC)
    return weekday_n_from(last, day, n)


def is_weekday_n(t: datetime, day: int, n: int) -> bool:
    """Report whether t is the nth occurrence of the weekday in its month."""
    if n == 0 or Weekday.of(t) != day:
        return False
    if n > 0:
        return (t.day - 1) // 7 == n - 1
    want = weekday_n(t.year, t.month, day, n)
    return (want.year, want.month, want.day) == (t.year, t.month, t.day)


def day_start(t: datetime) -> datetime:
    """Return the start of the day of t."""
    return t.replace(hour=0, minute=0, second=0, microsecond=0)


def day_end(t: datetime) -> datetime:
    """Return the last representable instant of the day of t."""
    return t.replace(hour=23, minute=59, second=59, microsecond=999999)


def month_start(t: datetime) -> datetime:
    """Return the first day of t's month, keeping the time of day."""
    return t.replace(day=1)


def month_end(t: datetime) -> datetime:
    """Return the last day of t's month, keeping the time of day."""
    return t.replace(day=_days_in_month(t.year, t.month))


def replace_location(t: datetime, loc: tzinfo | None) -> datetime:
    """Return t with its time zone replaced, keeping the wall-clock time."""
    return t.replace(tzinfo=loc)


def julian_day_number(t: datetime) -> int:
    """Return the Julian Day Number of t; Julian days start at 12:00 UTC."""
    utc = t.astimezone(timezone.utc)
    a = (14 - utc.month) // 12
    y = utc.year + 4800 - a
    m = utc.month + 12 * a - 3
    jdn = utc.day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045
    if utc.hour < 12:
        jdn -= 1
    return jdn


def julian_date(t: datetime) -> float:
    """Return the Julian Date of t, with the time of day as a fraction."""
    utc = t.astimezone(timezone.utc)
    jdn = julian_day_number(t)
    if utc.hour < 12:
        jdn += 1
    return jdn + (utc.hour - 12.0) / 24.0 + utc.minute / 1440.0 + utc.second / 86400.0


def modified_julian_date(t: datetime) -> float:
    """Return the modified Julian Date of t; its days start at 00:00 UTC."""
    return julian_date(t) - 2400000.5


def modified_julian_day_number(t: datetime) -> int:
    """Return the modified Julian Day Number of t."""
    return int(modified_julian_date(t))


def max_time(*args: datetime) -> datetime | None:
    """Return the latest of the given times, or None if there are none."""
    return max(args) if args else None


def min_time(*args: datetime) -> datetime | None:
    """Return the earliest of the given times, or None if there are none."""
    return min(args) if args else None