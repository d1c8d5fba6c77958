"""Holiday definitions for Belgium."""

from __future__ import annotations

from bizcal import holiday as common
from bizcal.holiday import Holiday, ObservanceType, calc_day_of_month

_PUBLIC = ObservanceType.PUBLIC

NIEUWJAAR = common.NEW_YEAR.clone(name="Nieuwjaarsdag", type=_PUBLIC)

PAASMAANDAG = common.EASTER_MONDAY.clone(name="Paasmaandag", type=_PUBLIC)

DAG_VAN_DE_ARBEID = common.WORKERS_DAY.clone(name="Dag van de Arbeid", type=_PUBLIC)

ONZE_LIEVE_HEER_HEMELVAART = common.ASCENSION_DAY.clone(
    name="Onze Lieve Heer Hemelvaart", type=_PUBLIC
)

PINKSTERMAANDAG = common.PENTECOST_MONDAY.clone(name="Pinkstermaandag", type=_PUBLIC)

NATIONALE_FEESTDAG = Holiday(
    name="Nationale Feestdag", type=_PUBLIC, month=7, day=21, func=calc_day_of_month
)

ONZE_LIEVE_VROUW_HEMELVAART = common.ASSUMPTION_OF_MARY.clone(
    name="Onze Lieve Vrouw Hemelvaart", type=_PUBLIC
)

ALLERHEILIGEN = common.ALL_SAINTS_DAY.clone(name="Allerheiligen", type=_PUBLIC)

WAPENSTILSTAND = common.ARMISTICE_DAY.clone(name="Wapenstilstand", type=_PUBLIC)

KERSTMIS = common.CHRISTMAS_DAY.clone(name="Kerstmis", type=_PUBLIC)

# The standard national holidays.
HOLIDAYS = (
    NIEUWJAAR,
    PAASMAANDAG,
    DAG_VAN_DE_ARBEID,
    ONZE_LIEVE_HEER_HEMELVAART,
    PINKSTERMAANDAG,
    NATIONALE_FEESTDAG,
    ONZE_LIEVE_VROUW_HEMELVAART,
    ALLERHEILIGEN,
    WAPENSTILSTAND,
    KERSTMIS,
)