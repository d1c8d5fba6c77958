"""Business calendar: workdays, working hours and related arithmetic."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from bizcal.calendar import Calendar
from bizcal.funcs import Weekday, day_start, min_time

WorkdayFunc = Callable[[datetime], bool]
WorkdayTimeFunc = Callable[[datetime], datetime]

_ONE_DAY = timedelta(days=1)
_END_OF_DAY = timedelta(hours=24)


def _default_workdays() -> set[Weekday]:
    return {
        Weekday.MONDAY,
        Weekday.TUESDAY,
        Weekday.WEDNESDAY,
        Weekday.THURSDAY,
        Weekday.FRIDAY,
    }


def _clock(d: timedelta) -> tuple[int, int, int]:
    """Split a time-of-day offset into hour, minute and second."""
    total = int(d.total_seconds())
    return (total // 3600) % 24, (total // 60) % 60, total % 60


@dataclass(eq=False)
class BusinessCalendar(Calendar):
    """A calendar of workdays and working hours, Monday to Friday 9am-5pm by default.

    `workday_func`, `workday_start_func` and `workday_end_func` override the
    fixed workdays and hours when set.
    """

    workdays: set[Weekday] = field(default_factory=_default_workdays)
    workday_func: Optional[WorkdayFunc] = None
    work_start: timedelta = timedelta(hours=9)
    workday_start_func: Optional[WorkdayTimeFunc] = None
    work_end: timedelta = timedelta(hours=17)
    workday_end_func: Optional[WorkdayTimeFunc] = None

    def set_workday(self, day: Weekday, workday: bool) -> None:
        """Mark or unmark a day of the week as a standard working day."""
        if workday:
            self.workdays.add(Weekday(day))
        else:
            self.workdays.discard(Weekday(day))

    def set_work_hours(self, start: timedelta, end: timedelta) -> None:
        """Set the time of day at which workdays start and end."""
        self.work_start = start
        self.work_end = end

    def is_workday(self, date: datetime) -> bool:
        """Report whether the date is a working day that is not an observed holiday."""
        if self.workday_func is None:
            workday = Weekday.of(date) in self.workdays
        else:
            workday = self.workday_func(date)
        if not workday:
            return False
        return not self.is_holiday(date).observed

    def _start_clock(self, date: datetime) -> tuple[int, int, int]:
        if self.workday_start_func is None:
            return _clock(self.work_start)
        start = self.workday_start_func(date)
        return start.hour, start.minute, start.second

    def _end_clock(self, date: datetime, whole_day: bool) -> tuple[int, int, int]:
        if self.workday_end_func is None:
            # 24h conventionally means "until the end of the day"
            if whole_day and self.work_end == _END_OF_DAY:
                return 23, 59, 59
            return _clock(self.work_end)
        end = self.workday_end_func(date)
        return end.hour, end.minute, end.second

    def is_work_time(self, date: datetime) -> bool:
        """Report whether the date and time fall within working hours."""
        if not self.is_workday(date):
            return False
        sh, sm, ss = self._start_clock(date)
        eh, em, es = self._end_clock(date, whole_day=True)
        h, m, s = date.hour, date.minute, date.second
        return (
            (h == sh and m == sm and s >= ss)
            or (h == sh and m > sm)
            or (sh < h < eh)
            or (h == eh and m < em)
            or (h == eh and m == em and s <= es)
        )

    def workdays_remain(self, date: datetime) -> int:
        """Count the workdays after the date until the end of its month."""
        count = 0
        month = date.month
        current = date + _ONE_DAY
        while current.month == month:
            if self.is_workday(current):
                count += 1
            current += _ONE_DAY
        return count

    def workdays_in_month(self, year: int, month: int) -> int:
        """Count the workdays in the given month."""
        first = datetime(year, month, 1, 12, tzinfo=timezone.utc)
        return self.workdays_remain(first) + (1 if self.is_workday(first) else 0)

    def _count_days(self, start: datetime, end: datetime, test) -> int:
        factor = 1
        if end < start:
            factor = -1
            start, end = end, start
        last = day_start(end)
        current = day_start(start)
        count = 0
        while current <= last:
            if test(current):
                count += 1
            current += _ONE_DAY
        return factor * count

    def holidays_in_range(self, start: datetime, end: datetime) -> int:
        """Count observed holidays between start and end inclusive; negative if reversed."""
        return self._count_days(start, end, lambda d: self.is_holiday(d).observed)

    def workdays_in_range(self, start: datetime, end: datetime) -> int:
        """Count workdays between start and end inclusive; negative if reversed."""
        return self._count_days(start, end, self.is_workday)

    def workday_n(self, year: int, month: int, n: int) -> int:
        """Return the day of the month of the nth workday, or 0 if there is none.

        Positive n counts from the start of the month, negative from the end.
        """
        if n == 0:
            return 0
        if n > 0:
            current = datetime(year, month, 1, 12, tzinfo=timezone.utc)
            step = _ONE_DAY
        else:
            next_year, next_month = (year + 1, 1) if month == 12 else (year, month + 1)
            current = datetime(next_year, next_month, 1, 12, tzinfo=timezone.utc) - _ONE_DAY
            step = -_ONE_DAY
            n = -n

        found = 0
        while current.month == month:
            if self.is_workday(current):
                found += 1
                if found == n:
                    return current.day
            current += step
        return 0

    def workdays_from(self, start: datetime, offset: int) -> datetime:
        """Return the date that is `offset` workdays away from start."""
        if offset == 0:
            return start
        step = _ONE_DAY if offset > 0 else -_ONE_DAY
        remaining = abs(offset)
        current = start
        while remaining > 0:
            current += step
            if self.is_workday(current):
                remaining -= 1
        return current

    def work_hours(self, date: datetime) -> timedelta:
        """Return the length of the working day for the date (zero if not a workday)."""
        if not self.is_workday(date):
            return timedelta(0)
        sh, sm, _ = self._start_clock(date)
        eh, em, _ = self._end_clock(date, whole_day=False)
        return timedelta(hours=eh, minutes=em) - timedelta(hours=sh, minutes=sm)

    def workday_start(self, date: datetime) -> datetime | None:
        """Return when work starts on the date, or None if it is not a workday."""
        if not self.is_workday(date):
            return None
        if self.workday_start_func is None:
            return day_start(date) + self.work_start
        return self.workday_start_func(date)

    def workday_end(self, date: datetime) -> datetime | None:
        """Return when work ends on the date, or None if it is not a workday."""
        if not self.is_workday(date):
            return None
        if self.workday_end_func is None:
            return day_start(date) + self.work_end
        return self.workday_end_func(date)

    def _next_workday(self, date: datetime, boundary: datetime | None) -> datetime:
        current = date
        if boundary is None or date > boundary:
            current += _ONE_DAY
        while not self.is_workday(current):
            current += _ONE_DAY
        return current

    def next_workday_start(self, date: datetime) -> datetime:
        """Return the start of the next workday from the date."""
        day = self._next_workday(date, self.workday_start(date))
        return self.workday_start(day)

    def next_workday_end(self, date: datetime) -> datetime:
        """Return the end of the current or next workday from the date."""
        day = self._next_workday(date, self.workday_end(date))
        return self.workday_end(day)

    def work_hours_in_range(self, start: datetime, end: datetime) -> timedelta:
        """Return the working time between start and end, in either order."""
        if end < start:
            start, end = end, start

        if self.is_work_time(start):
            current = start
        else:
            start_of_day = self.workday_start(start)
            if start_of_day is None or start > self.workday_end(start):
                current = self.next_workday_start(start)
            else:
                current = start_of_day

        total = timedelta(0)
        while current < end:
            last = min_time(self.workday_end(current), end)
            total += last - current
            current = self.next_workday_start(last)
        return total

    def add_work_hours(self, date: datetime, worked: timedelta) -> datetime:
        """Return when `worked` hours of work starting at the date are complete.

        A non-positive duration returns the date unchanged.
        """
        if worked <= timedelta(0):
            return date

        start = date
        if not self.is_workday(start):
            start = self.next_workday_start(start)
        elif not self.is_work_time(start):
            start_of_day = self.workday_start(start)
            end_of_day = self.workday_end(start)
            if start < start_of_day:
                start = start_of_day
            elif start > end_of_day:
                start = self.next_workday_start(start)

        result = start
        while worked > timedelta(0):
            end_of_day = self.workday_end(start)
            result = min_time(start + worked, end_of_day)
            worked -= self.work_hours_in_range(start, result)
            start = self.next_workday_start(end_of_day)
        return result