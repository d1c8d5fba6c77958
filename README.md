# bizcal

Holiday definitions and business-calendar arithmetic. It tells you which
days are holidays and which days and hours are worked. It can also count
working time and move a date forward or back by it.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Holidays

A `Holiday` (in `bizcal.holiday`) describes how to find a holiday's date
in any year. It is a frozen dataclass. `calc(year)` returns a pair: the
actual date and the observed date. Both are `None` when the holiday does
not occur that year, which is decided by `start_year` and `end_year`.

The observed date differs from the actual date when one of the
holiday's `AltDay` rules matches the weekday of the actual date. The
rule then shifts the date by its `offset` in days.

```python
from bizcal.funcs import Weekday
from bizcal.holiday import AltDay, Holiday, ObservanceType, calc_day_of_month

independence = Holiday(
    name="Independence Day",
    type=ObservanceType.PUBLIC,
    month=7,
    day=4,
    observed=[AltDay(Weekday.SATURDAY, -1), AltDay(Weekday.SUNDAY, 1)],
    func=calc_day_of_month,
)
actual, observed = independence.calc(2015)   # 4 July, observed Friday 3 July
```

These functions find a holiday's date:

- `calc_day_of_month`: a fixed month and day.
- `calc_easter_offset`: Easter Sunday shifted by `offset` days. It uses Julian Easter when `julian` is set.
- `calc_weekday_offset`: the `offset`th `weekday` of `month`. A negative `offset` counts from the end of the month.
- `calc_weekday_from`: the `offset`th `weekday` counting from `month`/`day`.

`Holiday.clone(**fields)` returns a copy with some fields replaced.

`bizcal.holiday` also defines common holidays that are shared between
countries. They are `NEW_YEAR`, `EPIPHANY`, `MAUNDY_THURSDAY`,
`GOOD_FRIDAY`, `EASTER`, `EASTER_MONDAY`, `WORKERS_DAY`, `ASCENSION_DAY`,
`PENTECOST`, `PENTECOST_MONDAY`, `CORPUS_CHRISTI`, `ASSUMPTION_OF_MARY`,
`ALL_SAINTS_DAY`, `ARMISTICE_DAY`, `IMMACULATE_CONCEPTION`,
`CHRISTMAS_DAY` and `CHRISTMAS_DAY_2`.

### Country definitions

`bizcal.countries` has ready-made holidays for these countries:

| Module | Country | Holiday lists |
|---|---|---|
| `ar` | Argentina | `HOLIDAYS` |
| `at` | Austria | `HOLIDAYS` |
| `au` | Australia | `HOLIDAYS_ACT`, `HOLIDAYS_NSW`, `HOLIDAYS_NT`, `HOLIDAYS_QLD`, `HOLIDAYS_SA`, `HOLIDAYS_TAS`, `HOLIDAYS_VIC`, `HOLIDAYS_WA` |
| `be` | Belgium | `HOLIDAYS` |
| `br` | Brazil | `HOLIDAYS` |

Each holiday is also available on its own as a module-level name, such
as `au.MELBOURNE_CUP` or `at.NATIONALFEIERTAG`.

## Calendars

`Calendar` (in `bizcal.calendar`) holds a list of holidays.
`is_holiday(date)` returns a `HolidayMatch(actual, observed, holiday)`.
It also catches observances that spill into the neighbouring year, for
example a Saturday 1 January that is observed on Friday 31 December.

If `locations` is set, the calendar only applies to dates whose `tzinfo`
is one of the listed objects.

With `cacheable=True`, results of lookups are kept. The cache holds at
most `CACHE_MAX_SIZE` days and drops `CACHE_EVICT_SIZE` entries when it
is full. Do not change the holiday definitions while caching is on.

`BusinessCalendar` (in `bizcal.business`) adds working days and working
hours. By default these are Monday to Friday, 9:00 to 17:00:

```python
from datetime import datetime, timedelta, timezone

from bizcal.business import BusinessCalendar
from bizcal.countries import at

cal = BusinessCalendar()
cal.add_holiday(*at.HOLIDAYS)
cal.set_work_hours(timedelta(hours=8, minutes=30), timedelta(hours=17))

start = datetime(2022, 12, 23, 10, 0, tzinfo=timezone.utc)
cal.is_workday(start)
cal.workdays_from(start, 3)
cal.add_work_hours(start, timedelta(hours=12))
cal.work_hours_in_range(start, start + timedelta(days=7))
```

A day is a workday when its weekday is a working day and it is not an
observed holiday.

A working end time of 24 hours counts as "until the end of the day".

### Other methods

| Method | What it does |
|---|---|
| `set_workday(day, workday)` | Marks or unmarks a day of the week as a working day. |
| `is_work_time(date)` | Tells whether a date and time fall within working hours. |
| `workdays_remain(date)` | Counts the workdays left in the month. |
| `workdays_in_month(year, month)` | Counts the workdays in a month. |
| `workdays_in_range(start, end)` | Counts workdays between two dates, inclusive. The result is negative when the range is reversed. |
| `holidays_in_range(start, end)` | Counts observed holidays between two dates, inclusive. The result is negative when the range is reversed. |
| `workday_n(year, month, n)` | Gives the day of the month of the nth workday. A negative `n` counts from the end; the result is 0 when there is none. |
| `work_hours(date)` | Gives the working time on a day. |
| `workday_start(date)`, `workday_end(date)` | Give when work starts and ends. The result is `None` on non-workdays. |
| `next_workday_start(date)`, `next_workday_end(date)` | Give the start or end of the next working day. |

For working days and hours that change through the year, set
`workday_func`, `workday_start_func` and `workday_end_func`.

## Date helpers

`bizcal.funcs` provides:

- `Weekday`: an `IntEnum` numbered from Sunday. `Weekday.of(dt)` gives the weekday of a datetime.
- `is_weekend`.
- `weekday_n`, `weekday_n_from` and `is_weekday_n`, for finding the nth weekday.
- `day_start`, `day_end`, `month_start` and `month_end`.
- `replace_location`, which swaps the time zone and keeps the wall-clock time.
- `julian_day_number`, `julian_date`, `modified_julian_day_number` and `modified_julian_date`.
- `min_time` and `max_time`. They return `None` when given nothing.

Dates built from a year alone use the time zone in `funcs.DEFAULT_LOC`.
Its default is `None`, which gives naive datetimes.

## What this package does not do

- It is a library only; there is no command-line tool.
- Country holiday definitions are limited to the five countries listed above.
- For other places, build `Holiday` objects yourself with the calculation functions.