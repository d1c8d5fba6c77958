"""Holiday definitions for Argentina."""

from __future__ import annotations

from bizcal.funcs import Weekday
from bizcal.holiday import (
    AltDay,
    Holiday,
    ObservanceType,
    calc_day_of_month,
    calc_easter_offset,
)

# Saturdays move to Friday, Sundays move to Monday.
_WEEKEND_ALT = (
    AltDay(Weekday.SATURDAY, -1),
    AltDay(Weekday.SUNDAY, 1),
)

_PUBLIC = ObservanceType.PUBLIC

NEW_YEAR = Holiday(
    name="Año nuevo", type=_PUBLIC, month=1, day=1, func=calc_day_of_month
)

CARNIVAL_DAY_1 = Holiday(
    name="Carnaval Día 1", type=_PUBLIC, offset=-48, func=calc_easter_offset
)

CARNIVAL_DAY_2 = Holiday(
    name="Carnaval Día 2", type=_PUBLIC, offset=-47, func=calc_easter_offset
)

# Commemoration of the 1976 coup.
TRUTH_DAY = Holiday(
    name="Día de la verdad y justicia",
    type=_PUBLIC,
    month=3,
    day=24,
    func=calc_day_of_month,
)

MALVINAS_VETERANS = Holiday(
    name="Día de los Veteranos de la Guerra de Malvinas",
    type=_PUBLIC,
    month=4,
    day=2,
    func=calc_day_of_month,
)

EASTERNS_DAY = Holiday(
    name="Viernes Santo", type=_PUBLIC, offset=-3, func=calc_easter_offset
)

LABOR_DAY = Holiday(
    name="Día del trabajador", type=_PUBLIC, month=5, day=1, func=calc_day_of_month
)

REVOLUTION_DAY = Holiday(
    name="Revolución de Mayo", type=_PUBLIC, month=5, day=25, func=calc_day_of_month
)

GUEMES_DAY = Holiday(
    name="Aniversario paso a la inmortalidad del General Martín Miguel de Güemes",
    type=_PUBLIC,
    observed=_WEEKEND_ALT,
    month=6,
    day=17,
    func=calc_day_of_month,
)

BELGRANO_DAY = Holiday(
    name="Aniversario paso a la inmortalidad del General Juan Manuel Belgrano",
    type=_PUBLIC,
    observed=_WEEKEND_ALT,
    month=6,
    day=20,
    func=calc_day_of_month,
)

INDEPENDENCE_DAY = Holiday(
    name="Día de la independencia",
    type=_PUBLIC,
    month=7,
    day=9,
    func=calc_day_of_month,
)

SAN_MARTIN_DAY = Holiday(
    name="Aniversario paso a la inmortalidad del General José de San Martín",
    type=_PUBLIC,
    observed=_WEEKEND_ALT,
    month=8,
    day=17,
    func=calc_day_of_month,
)

DIVERSITY_DAY = Holiday(
    name="Día del respeto a la diversidad cultural",
    type=_PUBLIC,
    observed=_WEEKEND_ALT,
    month=10,
    day=12,
    func=calc_day_of_month,
)

SOVEREIGNTY_DAY = Holiday(
    name="Día de la Soberanía Nacional",
    type=_PUBLIC,
    observed=_WEEKEND_ALT,
    month=11,
    day=20,
    func=calc_day_of_month,
)

VIRGEN_DAY = Holiday(
    name="Día de la virgen María",
    type=_PUBLIC,
    month=12,
    day=8,
    func=calc_day_of_month,
)

CHRISTMAS_DAY = Holiday(
    name="Navidad", type=_PUBLIC, month=12, day=25, func=calc_day_of_month
)

# The standard national holidays.
HOLIDAYS = (
    NEW_YEAR,
    CARNIVAL_DAY_1,
    CARNIVAL_DAY_2,
    TRUTH_DAY,
    MALVINAS_VETERANS,
    EASTERNS_DAY,
    LABOR_DAY,
    REVOLUTION_DAY,
    GUEMES_DAY,
    BELGRANO_DAY,
    INDEPENDENCE_DAY,
    SAN_MARTIN_DAY,
    DIVERSITY_DAY,
    SOVEREIGNTY_DAY,
    VIRGEN_DAY,
    CHRISTMAS_DAY,
)