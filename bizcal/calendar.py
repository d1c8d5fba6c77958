"""A yearly calendar holding a list of holidays."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, tzinfo
from typing import NamedTuple, Optional

from bizcal.holiday import Holiday

# Maximum number of days remembered by a cacheable calendar.
CACHE_MAX_SIZE = 365 * 3
# Number of entries dropped when the cache is full.
CACHE_EVICT_SIZE = 30


class HolidayMatch(NamedTuple):
    """Result of a holiday lookup for a single date."""

    actual: bool
    observed: bool
    holiday: Optional[Holiday]


_NO_MATCH = HolidayMatch(False, False, None)


def _same_day(t: datetime | None, key: tuple[int, int, int]) -> bool:
    return t is not None and (t.year, t.month, t.day) == key


@dataclass(eq=False)
class Calendar:
    """A calendar with holidays, optionally limited to some time zones.

    With `cacheable` set, lookups are remembered; holiday definitions must not
    change while it is enabled.
    """

    name: str = ""
    description: str = ""
    locations: Optional[list[Optional[tzinfo]]] = None
    holidays: list[Holiday] = field(default_factory=list)
    cacheable: bool = False
    _cache: dict[tuple[int, int, int], HolidayMatch] = field(
        default_factory=dict, init=False, repr=False
    )

    def is_applicable(self, loc: tzinfo | None) -> bool:
        """Report whether the calendar applies to the given time zone.

        A calendar without locations applies everywhere.
        """
        if self.locations is None:
            return True
        return any(candidate is loc for candidate in self.locations)

    def add_holiday(self, *args: Holiday) -> None:
        """Add holidays to the calendar."""
        self.holidays.extend(args)

    def is_holiday(self, date: datetime) -> HolidayMatch:
        """Report whether the date is a holiday's actual or observed day."""
        if not self.holidays or not self.is_applicable(date.tzinfo):
            return _NO_MATCH

        key = (date.year, date.month, date.day)
        if self.cacheable and key in self._cache:
            return self._cache[key]

        year, month, day = key
        for hol in self.holidays:
            actual, observed = hol.calc(year)
            act_match = actual is not None and (actual.month, actual.day) == (month, day)
            obs_match = _same_day(observed, key)
            if act_match or obs_match:
                return self._remember(key, HolidayMatch(act_match, obs_match, hol))

            # observances can spill into the neighbouring year, e.g. New Year's
            # Day on Saturday 1 Jan observed on Friday 31 Dec
            if hol.observed and actual is not None and actual.month in (1, 12):
                other_year = year + 1 if actual.month == 1 else year - 1
                _, observed = hol.calc(other_year)
                if _same_day(observed, key):
                    return self._remember(key, HolidayMatch(False, True, hol))

        return self._remember(key, _NO_MATCH)

    def _remember(self, key: tuple[int, int, int], match: HolidayMatch) -> HolidayMatch:
        if self.cacheable:
            self._evict()
            self._cache[key] = match
        return match

    def _evict(self) -> None:
        if len(self._cache) >= CACHE_MAX_SIZE:
            for stale in list(self._cache)[:CACHE_EVICT_SIZE]:
                del self._cache[stale]