"""Holiday definitions, their calculation rules and common shared holidays."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import IntEnum
from typing import Callable, Optional

from bizcal import funcs as _funcs
from bizcal.funcs import Weekday


class ObservanceType(IntEnum):
    """Kind of observance a holiday represents."""

    UNKNOWN = 0
    PUBLIC = 1
    BANK = 2
    OTHER = 3


@dataclass(frozen=True)
class AltDay:
    """Moves a holiday falling on `day` by `offset` days for its observance."""

    day: Weekday
    offset: int


HolidayFunc = Callable[["Holiday", int], Optional[datetime]]


@dataclass(frozen=True, eq=False)
class Holiday:
    """A holiday and the rule that places it in a given year."""

    name: str = ""
    description: str = ""
    type: ObservanceType = ObservanceType.UNKNOWN
    month: int = 0
    day: int = 0
    weekday: Weekday = Weekday.SUNDAY
    offset: int = 0
    julian: bool = False
    observed: tuple[AltDay, ...] = ()
    start_year: int = 0
    end_year: int = 0
    func: Optional[HolidayFunc] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "observed", tuple(self.observed))

    def calc(self, year: int) -> tuple[datetime | None, datetime | None]:
        """Return the actual and observed dates of the holiday in `year`.

        Both are None when the holiday does not occur that year.
        """
        if (self.start_year and year < self.start_year) or (
            self.end_year and year > self.end_year
        ):
            return None, None
        if self.func is None:
            raise ValueError(f"holiday {self.name!r} has no calculation function")

        actual = self.func(self, year)
        if actual is None:
            return None, None

        observed = actual
        weekday = Weekday.of(actual)
        for alt in self.observed:
            if weekday == alt.day:
                observed = actual + timedelta(days=alt.offset)
                break
        return actual, observed

    def clone(self, **kwargs) -> Holiday:
        """Return a copy of this holiday with the given fields replaced."""
        return dataclasses.replace(self, **kwargs)


def _at_midnight(d: date) -> datetime:
    return datetime(d.year, d.month, d.day, tzinfo=_funcs.DEFAULT_LOC)


def _gregorian_easter(year: int) -> date:
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l_ = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l_) // 451
    month, day = divmod(h + l_ - 7 * m + 114, 31)
    return date(year, month, day + 1)


def _julian_easter(year: int) -> date:
    """Easter by the Julian calendar, expressed as a Gregorian date."""
    a = year % 4
    b = year % 7
    c = year % 19
    d = (19 * c + 15) % 30
    e = (2 * a + 4 * b - d + 34) % 7
    month, day = divmod(d + e + 114, 31)
    shift = year // 100 - year // 400 - 2
    return date(year, month, day + 1) + timedelta(days=shift)


def calc_day_of_month(h: Holiday, year: int) -> datetime:
    """Fixed date: `h.month` / `h.day`."""
    return datetime(year, h.month, h.day, tzinfo=_funcs.DEFAULT_LOC)


def calc_easter_offset(h: Holiday, year: int) -> datetime:
    """Easter Sunday shifted by `h.offset` days; Julian Easter if `h.julian`."""
    easter = _julian_easter(year) if h.julian else _gregorian_easter(year)
    return _at_midnight(easter) + timedelta(days=h.offset)


def calc_weekday_offset(h: Holiday, year: int) -> datetime | None:
    """The `h.offset`th `h.weekday` of `h.month` (negative counts from the end)."""
    found = _funcs.weekday_n(year, h.month, h.weekday, h.offset)
    return None if found is None else _funcs.day_start(found)


def calc_weekday_from(h: Holiday, year: int) -> datetime | None:
    """The `h.offset`th `h.weekday` counting from `h.month` / `h.day`."""
    start = datetime(year, h.month, h.day, tzinfo=_funcs.DEFAULT_LOC)
    return _funcs.weekday_n_from(start, h.weekday, h.offset)


NEW_YEAR = Holiday(name="New Year's Day", month=1, day=1, func=calc_day_of_month)
EPIPHANY = Holiday(name="Epiphany", month=1, day=6, func=calc_day_of_month)
MAUNDY_THURSDAY = Holiday(name="Maundy Thursday", offset=-3, func=calc_easter_offset)
GOOD_FRIDAY = Holiday(name="Good Friday", offset=-2, func=calc_easter_offset)
EASTER = Holiday(name="Easter", offset=0, func=calc_easter_offset)
EASTER_MONDAY = Holiday(name="Easter Monday", offset=1, func=calc_easter_offset)
WORKERS_DAY = Holiday(
    name="International Workers' Day", month=5, day=1, func=calc_day_of_month
)
ASCENSION_DAY = Holiday(name="Ascension Day", offset=39, func=calc_easter_offset)
PENTECOST = Holiday(name="Pentecost", offset=49, func=calc_easter_offset)
PENTECOST_MONDAY = Holiday(name="Pentecost Monday", offset=50, func=calc_easter_offset)
CORPUS_CHRISTI = Holiday(name="Corpus Christi", offset=60, func=calc_easter_offset)
ASSUMPTION_OF_MARY = Holiday(
    name="Assumption of Mary", month=8, day=15, func=calc_day_of_month
)
ALL_SAINTS_DAY = Holiday(name="All Saints' Day", month=11, day=1, func=calc_day_of_month)
ARMISTICE_DAY = Holiday(name="Armistice Day", month=11, day=11, func=calc_day_of_month)
IMMACULATE_CONCEPTION = Holiday(
    name="Immaculate Conception", month=12, day=8, func=calc_day_of_month
)
CHRISTMAS_DAY = Holiday(name="Christmas Day", month=12, day=25, func=calc_day_of_month)
CHRISTMAS_DAY_2 = Holiday(
    name="2nd Day of Christmas", month=12, day=26, func=calc_day_of_month
)