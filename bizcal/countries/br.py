"""Holiday definitions for Brazil."""

from __future__ import annotations

from bizcal import holiday as common
from bizcal.holiday import (
    Holiday,
    ObservanceType,
    calc_day_of_month,
    calc_easter_offset,
)

_PUBLIC = ObservanceType.PUBLIC

ANO_NOVO = common.NEW_YEAR.clone(name="Ano Novo", type=_PUBLIC)

TIRADENTES = Holiday(name="Tiradentes", month=4, day=21, func=calc_day_of_month)

TRABALHADOR = common.WORKERS_DAY.clone(name="Dia do Trabalhador", type=_PUBLIC)

INDEPENDENCIA = Holiday(
    name="Independência do Brasil", month=9, day=7, func=calc_day_of_month
)

NOSSA_SENHORA_APARECIDA = Holiday(
    name="Nossa Senhora Aparecida", month=10, day=12, func=calc_day_of_month
)

FINADOS = Holiday(name="Finados", month=11, day=2, func=calc_day_of_month)

REPUBLICA = Holiday(
    name="Proclamação da República", month=11, day=15, func=calc_day_of_month
)

CORPUS_CHRISTI = common.CORPUS_CHRISTI.clone(name="Corpus Christi", type=_PUBLIC)

SEXTA_FEIRA_SANTA = common.GOOD_FRIDAY.clone(name="Sexta-feira Santa", type=_PUBLIC)

# Carnival Tuesday, 47 days before Easter.
CARNAVAL = Holiday(name="Carnaval", type=_PUBLIC, offset=-47, func=calc_easter_offset)

NATAL = common.CHRISTMAS_DAY.clone(name="Natal", type=_PUBLIC)

# The standard national holidays.
HOLIDAYS = (
    ANO_NOVO,
    TIRADENTES,
    TRABALHADOR,
    INDEPENDENCIA,
    NOSSA_SENHORA_APARECIDA,
    FINADOS,
    REPUBLICA,
    CORPUS_CHRISTI,
    SEXTA_FEIRA_SANTA,
    CARNAVAL,
    NATAL,
)