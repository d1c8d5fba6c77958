"""Holiday definitions for Austria."""

from __future__ import annotations

from bizcal import holiday as common
from bizcal.holiday import Holiday, ObservanceType, calc_day_of_month

_PUBLIC = ObservanceType.PUBLIC

NEUJAHR = common.NEW_YEAR.clone(name="Neujahrstag", type=_PUBLIC)

HEILIGE_DREI_KOENIGE = common.EPIPHANY.clone(name="Heilige Drei Könige", type=_PUBLIC)

OSTERMONTAG = common.EASTER_MONDAY.clone(name="Ostermontag", type=_PUBLIC)

TAG_DER_ARBEIT = common.WORKERS_DAY.clone(name="Tag der Arbeit", type=_PUBLIC)

CHRISTI_HIMMELFAHRT = common.ASCENSION_DAY.clone(
    name="Christi Himmelfahrt", type=_PUBLIC
)

PFINGSTMONTAG = common.PENTECOST_MONDAY.clone(name="Pfingstmontag", type=_PUBLIC)

FRONLEICHNAM = common.CORPUS_CHRISTI.clone(name="Fronleichnam", type=_PUBLIC)

MARIA_HIMMELFAHRT = common.ASSUMPTION_OF_MARY.clone(
    name="Mariä Himmelfahrt", type=_PUBLIC
)

NATIONALFEIERTAG = Holiday(
    name="Nationalfeiertag", type=_PUBLIC, month=10, day=26, func=calc_day_of_month
)

ALLERHEILIGEN = common.ALL_SAINTS_DAY.clone(name="Allerheiligen", type=_PUBLIC)

MARIA_EMPFAENGNIS = common.IMMACULATE_CONCEPTION.clone(
    name="Mariä Empfängnis", type=_PUBLIC
)

CHRISTTAG = common.CHRISTMAS_DAY.clone(name="Christtag", type=_PUBLIC)

STEFANITAG = common.CHRISTMAS_DAY_2.clone(name="Stefanitag", type=_PUBLIC)

# The standard national holidays.
HOLIDAYS = (
    NEUJAHR,
    HEILIGE_DREI_KOENIGE,
    OSTERMONTAG,
    TAG_DER_ARBEIT,
    CHRISTI_HIMMELFAHRT,
    PFINGSTMONTAG,
    FRONLEICHNAM,
    MARIA_HIMMELFAHRT,
    NATIONALFEIERTAG,
    ALLERHEILIGEN,
    MARIA_EMPFAENGNIS,
    CHRISTTAG,
    STEFANITAG,
)