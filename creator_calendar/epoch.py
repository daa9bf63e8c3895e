"""
Wall-clock time -> Creator day.

This is the only place that maps an instant onto the cycle. Days are whole
24h spans counted from the observed spring Tequfah; each cycle lasts
364 days plus its Days Out of Time, so the selector also fixes cycle length.

One selector applies to every cycle, past and future: a multi-cycle export
assumes the same Tequfah each year, and changing the selector shifts where
earlier cycles begin.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional

import pytz

from .daypart import DayPartAdapter, as_utc
from .model import DayDescriptor
from .resolver import check_creator_day, resolve_day
from .tables import DEFAULT_TEQUFAH_DAY, cycle_length

UTC = pytz.UTC

# Observed spring Tequfah, Jerusalem 2025
TEQUFAH_EPOCH = UTC.localize(datetime(2025, 3, 20, 9, 37))
ONE_DAY = timedelta(days=1)


@dataclass(frozen=True)
class CyclePosition:
    cycle: int
    creator_day: int


def position_at(
    moment: datetime,
    tequfah_day: int = DEFAULT_TEQUFAH_DAY,
    epoch: datetime = TEQUFAH_EPOCH,
) -> CyclePosition:
    """Return the cycle number and Creator day holding ``moment``.

    Naive datetimes are read as UTC. Instants before the epoch land in
    negative cycles.
    """

    elapsed_days = (as_utc(moment) - as_utc(epoch)) // ONE_DAY
    cycle, index = divmod(elapsed_days, cycle_length(tequfah_day))
    return CyclePosition(cycle=cycle, creator_day=index + 1)


def moment_of(
    creator_day: int,
    cycle: int = 0,
    tequfah_day: int = DEFAULT_TEQUFAH_DAY,
    epoch: datetime = TEQUFAH_EPOCH,
) -> datetime:
    """Return the UTC instant at which ``creator_day`` of ``cycle`` begins."""

    length = cycle_length(tequfah_day)
    creator_day = check_creator_day(creator_day, length)
    return as_utc(epoch) + ONE_DAY * (cycle * length + creator_day - 1)


def civil_date_of(
    creator_day: int,
    tz: str,
    cycle: int = 0,
    tequfah_day: int = DEFAULT_TEQUFAH_DAY,
    epoch: datetime = TEQUFAH_EPOCH,
) -> date:
    return moment_of(creator_day, cycle, tequfah_day, epoch).astimezone(pytz.timezone(tz)).date()


def resolve_moment(
    moment: datetime,
    tequfah_day: int = DEFAULT_TEQUFAH_DAY,
    adapter: Optional[DayPartAdapter] = None,
    latitude: float = 0.0,
    longitude: float = 0.0,
    epoch: datetime = TEQUFAH_EPOCH,
) -> DayDescriptor:
    pos = position_at(moment, tequfah_day, epoch)
    desc = resolve_day(pos.creator_day, tequfah_day)
    if adapter is None:
        return desc
    return desc.with_part_of_day(adapter.classify(moment, latitude, longitude))
