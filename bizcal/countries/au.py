"""Holiday definitions for Australia."""

from __future__ import annotations

from datetime import datetime, timedelta

from bizcal import funcs as _funcs
from bizcal import holiday as common
from bizcal.funcs import Weekday, day_start, weekday_n
from bizcal.holiday import (
    AltDay,
    Holiday,
    ObservanceType,
    calc_day_of_month,
    calc_easter_offset,
    calc_weekday_from,
    calc_weekday_offset,
)

# Saturdays move to Monday, Sundays move to Monday.
_WEEKEND_ALT = (
    AltDay(Weekday.SATURDAY, 2),
    AltDay(Weekday.SUNDAY, 1),
)

# Boxing Day style: a weekend day moves two days on, a Monday one day on.
_SECOND_DAY_ALT = (
    AltDay(Weekday.SATURDAY, 2),
    AltDay(Weekday.SUNDAY, 2),
    AltDay(Weekday.MONDAY, 1),
)

_PUBLIC = ObservanceType.PUBLIC
_BANK = ObservanceType.BANK

# Years in which the AFL Grand Final did not follow the usual schedule.
_AFL_FINAL_EXCEPTIONS = {
    2015: (10, 2),
    2016: (9, 30),
    2020: (10, 23),
}


def _calc_friday_before_afl_final(_h: Holiday, year: int) -> datetime:
    """The Friday before the last Saturday of September, or a known exception."""
    if year in _AFL_FINAL_EXCEPTIONS:
        month, day = _AFL_FINAL_EXCEPTIONS[year]
        return datetime(year, month, day, tzinfo=_funcs.DEFAULT_LOC)
    final_day = day_start(weekday_n(year, 9, Weekday.SATURDAY, -1))
    return final_day - timedelta(days=1)


NEW_YEAR = common.NEW_YEAR.clone(
    name="New Year's Day", type=_PUBLIC, observed=_WEEKEND_ALT
)

AUSTRALIA_DAY = Holiday(
    name="Australia Day",
    type=_PUBLIC,
    month=1,
    day=26,
    observed=_WEEKEND_ALT,
    func=calc_day_of_month,
)

GOOD_FRIDAY = common.GOOD_FRIDAY.clone(name="Good Friday", type=_PUBLIC)

EASTER_SATURDAY = Holiday(name="Easter Saturday", offset=-1, func=calc_easter_offset)

EASTER_SUNDAY = Holiday(name="Easter Sunday", offset=0, func=calc_easter_offset)

EASTER_MONDAY = common.EASTER_MONDAY.clone(name="Easter Monday", type=_PUBLIC)

# Labour Day in WA on the first Monday of March.
LABOUR_DAY_WA = Holiday(
    name="Labour Day",
    type=_PUBLIC,
    month=3,
    weekday=Weekday.MONDAY,
    offset=1,
    func=calc_weekday_offset,
)

# Labour Day in VIC on the second Monday of March.
LABOUR_DAY_VIC = Holiday(
    name="Labour Day",
    type=_PUBLIC,
    month=3,
    weekday=Weekday.MONDAY,
    offset=2,
    func=calc_weekday_offset,
)

# Eight Hours Day in TAS on the second Monday of March.
LABOUR_DAY_TAS = Holiday(
    name="Eight Hours Day",
    type=_PUBLIC,
    month=3,
    weekday=Weekday.MONDAY,
    offset=2,
    func=calc_weekday_offset,
)

# Canberra Day in ACT on the second Monday of March.
CANBERRA_DAY = Holiday(
    name="Canberra Day",
    type=_PUBLIC,
    month=3,
    weekday=Weekday.MONDAY,
    offset=2,
    func=calc_weekday_offset,
)

# March Public Holiday in SA on the second Monday of March.
MARCH_PUBLIC_HOLIDAY = Holiday(
    name="March Public Holiday",
    type=_PUBLIC,
    month=3,
    weekday=Weekday.MONDAY,
    offset=2,
    func=calc_weekday_offset,
)

ANZAC_DAY = Holiday(
    name="ANZAC Day", type=_PUBLIC, month=4, day=25, func=calc_day_of_month
)

# ACT and WA observe ANZAC Day on Monday when it falls on a weekend.
ANZAC_DAY_ACT_WA = ANZAC_DAY.clone(observed=_WEEKEND_ALT)

# NT, QLD and SA observe ANZAC Day on Monday only when it falls on a Sunday.
ANZAC_DAY_NT_QLD_SA = ANZAC_DAY.clone(observed=(AltDay(Weekday.SUNDAY, 1),))

# May Day in NT and QLD on the first Monday of May.
LABOUR_DAY_NT_QLD = Holiday(
    name="Labour Day / May Day",
    type=_PUBLIC,
    month=5,
    weekday=Weekday.MONDAY,
    offset=1,
    func=calc_weekday_offset,
)

# Reconciliation Day in ACT on the first Monday on or after 27 May.
RECONCILIATION_DAY = Holiday(
    name="Reconciliation Day",
    type=_PUBLIC,
    month=5,
    day=27,
    weekday=Weekday.MONDAY,
    offset=1,
    func=calc_weekday_from,
    start_year=2018,
)

WESTERN_AUSTRALIA_DAY = Holiday(
    name="Western Australia Day",
    type=_PUBLIC,
    month=6,
    weekday=Weekday.MONDAY,
    offset=1,
    func=calc_weekday_offset,
)

# Queen's Birthday on the second Monday in June.
QUEENS_BIRTHDAY = Holiday(
    name="Queen's Birthday",
    type=_PUBLIC,
    month=6,
    weekday=Weekday.MONDAY,
    offset=2,
    func=calc_weekday_offset,
)

# Picnic Day in NT on the first Monday in August.
PICNIC_DAY = Holiday(
    name="Picnic Day",
    type=_PUBLIC,
    month=8,
    weekday=Weekday.MONDAY,
    offset=1,
    func=calc_weekday_offset,
)

# Queen's Birthday in WA on the last Monday in September.
QUEENS_BIRTHDAY_WA = Holiday(
    name="Queen's Birthday",
    type=_PUBLIC,
    month=9,
    weekday=Weekday.MONDAY,
    offset=-1,
    func=calc_weekday_offset,
)

# The Friday before the AFL Grand Final, subject to the AFL schedule.
FRIDAY_BEFORE_AFL_FINAL = Holiday(
    name="Friday before the AFL Grand Final",
    type=_PUBLIC,
    func=_calc_friday_before_afl_final,
    start_year=2015,
)

# Queen's Birthday in QLD on the first Monday in October.
QUEENS_BIRTHDAY_QLD = Holiday(
    name="Queen's Birthday",
    type=_PUBLIC,
    month=10,
    weekday=Weekday.MONDAY,
    offset=1,
    func=calc_weekday_offset,
)

# Labour Day in ACT, NSW and SA on the first Monday in October.
LABOUR_DAY_ACT_NSW_SA = Holiday(
    name="Labour Day",
    type=_PUBLIC,
    month=10,
    weekday=Weekday.MONDAY,
    offset=1,
    func=calc_weekday_offset,
)

# Melbourne Cup on the first Tuesday in November.
MELBOURNE_CUP = Holiday(
    name="Melbourne Cup",
    type=_PUBLIC,
    month=11,
    weekday=Weekday.TUESDAY,
    offset=1,
    func=calc_weekday_offset,
)

CHRISTMAS_DAY = common.CHRISTMAS_DAY.clone(
    name="Christmas Day", type=_BANK, observed=_WEEKEND_ALT
)

BOXING_DAY = common.CHRISTMAS_DAY_2.clone(
    name="Boxing Day", type=_BANK, observed=_SECOND_DAY_ALT
)

PROCLAMATION_DAY = common.CHRISTMAS_DAY_2.clone(
    name="Proclamation Day", type=_BANK, observed=_SECOND_DAY_ALT
)

# National Day of Mourning for Her Majesty the Queen.
MOURNING_DAY_2022 = Holiday(
    name="National Day of Mourning for Her Majesty the Queen",
    type=_PUBLIC,
    month=9,
    day=22,
    start_year=2022,
    end_year=2022,
    func=calc_day_of_month,
)

# Standard holidays in the Australian Capital Territory.
HOLIDAYS_ACT = (
    NEW_YEAR,
    AUSTRALIA_DAY,
    CANBERRA_DAY,
    GOOD_FRIDAY,
    EASTER_SATURDAY,
    EASTER_SUNDAY,
    EASTER_MONDAY,
    ANZAC_DAY_ACT_WA,
    RECONCILIATION_DAY,
    QUEENS_BIRTHDAY,
    MOURNING_DAY_2022,
    LABOUR_DAY_ACT_NSW_SA,
    CHRISTMAS_DAY,
    BOXING_DAY,
)

# Standard holidays in New South Wales.
HOLIDAYS_NSW = (
    NEW_YEAR,
    AUSTRALIA_DAY,
    GOOD_FRIDAY,
    EASTER_SATURDAY,
    EASTER_SUNDAY,
    EASTER_MONDAY,
    ANZAC_DAY,
    QUEENS_BIRTHDAY,
    MOURNING_DAY_2022,
    LABOUR_DAY_ACT_NSW_SA,
    CHRISTMAS_DAY,
    BOXING_DAY,
)

# Standard holidays in the Northern Territory.
HOLIDAYS_NT = (
    NEW_YEAR,
    AUSTRALIA_DAY,
    GOOD_FRIDAY,
    EASTER_SATURDAY,
    EASTER_MONDAY,
    ANZAC_DAY_NT_QLD_SA,
    LABOUR_DAY_NT_QLD,
    QUEENS_BIRTHDAY,
    PICNIC_DAY,
    MOURNING_DAY_2022,
    CHRISTMAS_DAY,
    BOXING_DAY,
)

# Standard holidays in Queensland.
HOLIDAYS_QLD = (
    NEW_YEAR,
    AUSTRALIA_DAY,
    GOOD_FRIDAY,
    EASTER_SATURDAY,
    EASTER_SUNDAY,
    EASTER_MONDAY,
    ANZAC_DAY_NT_QLD_SA,
    LABOUR_DAY_NT_QLD,
    MOURNING_DAY_2022,
    QUEENS_BIRTHDAY_QLD,
    CHRISTMAS_DAY,
    BOXING_DAY,
)

# Standard holidays in South Australia.
HOLIDAYS_SA = (
    NEW_YEAR,
    AUSTRALIA_DAY,
    MARCH_PUBLIC_HOLIDAY,
    GOOD_FRIDAY,
    EASTER_SATURDAY,
    EASTER_MONDAY,
    ANZAC_DAY_NT_QLD_SA,
    QUEENS_BIRTHDAY,
    MOURNING_DAY_2022,
    LABOUR_DAY_ACT_NSW_SA,
    CHRISTMAS_DAY,
    PROCLAMATION_DAY,
)

# Standard holidays in Tasmania.
HOLIDAYS_TAS = (
    NEW_YEAR,
    AUSTRALIA_DAY,
    LABOUR_DAY_TAS,
    GOOD_FRIDAY,
    EASTER_MONDAY,
    ANZAC_DAY,
    QUEENS_BIRTHDAY,
    MOURNING_DAY_2022,
    CHRISTMAS_DAY,
    BOXING_DAY,
)

# Standard holidays in Victoria.
HOLIDAYS_VIC = (
    NEW_YEAR,
    AUSTRALIA_DAY,
    LABOUR_DAY_VIC,
    GOOD_FRIDAY,
    EASTER_SATURDAY,
    EASTER_SUNDAY,
    EASTER_MONDAY,
    ANZAC_DAY,
    QUEENS_BIRTHDAY,
    MOURNING_DAY_2022,
    FRIDAY_BEFORE_AFL_FINAL,
    MELBOURNE_CUP,
    CHRISTMAS_DAY,
    BOXING_DAY,
)

# Standard holidays in Western Australia.
HOLIDAYS_WA = (
    NEW_YEAR,
    AUSTRALIA_DAY,
    LABOUR_DAY_WA,
    GOOD_FRIDAY,
    EASTER_MONDAY,
    ANZAC_DAY_ACT_WA,
    WESTERN_AUSTRALIA_DAY,
    QUEENS_BIRTHDAY_WA,
    MOURNING_DAY_2022,
    CHRISTMAS_DAY,
    BOXING_DAY,
)