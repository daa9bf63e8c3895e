"""
Day-part classification (Day, Evening, Night, Morning).

The resolver never computes this itself; callers plug in an adapter:

- ``FixedDayPart`` always answers the same part (placeholder)
- ``SkyfieldDayPart`` uses local sunrise/sunset from skyfield's almanac

Night (sunset -> next sunrise) is split in quarters: the first quarter is
Evening, the last quarter is Morning, the middle half is Night.
"""

from __future__ import annotations

from bisect import bisect_right
from datetime import datetime, timedelta
from typing import List, Optional, Protocol, Sequence, Tuple

import numpy as np
import pytz
from skyfield import almanac
from skyfield.api import load, wgs84

from .model import PartOfDay

UTC = pytz.UTC

EPHEMERIS_FILE = "de421.bsp"
SACRED_PARTS = 18
NIGHT_QUARTER = 0.25
SEARCH_WINDOW = timedelta(days=2)


class DayPartAdapter(Protocol):
    def classify(self, timestamp: datetime, latitude: float, longitude: float) -> PartOfDay:
        ...


def as_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return UTC.localize(dt)
    return dt.astimezone(UTC)


def sf_to_utc_dt(t) -> datetime:
    return as_utc(t.utc_datetime())


class FixedDayPart:
    def __init__(self, part: PartOfDay = PartOfDay.DAY):
        self.part = PartOfDay(part)

    def classify(self, timestamp: datetime, latitude: float, longitude: float) -> PartOfDay:
        return self.part


def classify_from_events(moment: datetime, changes: Sequence[datetime], states) -> Optional[PartOfDay]:
    """Classify ``moment`` against sorted sun events.

    ``states[i]`` is 1 for a sunrise and 0 for a sunset at ``changes[i]``.
    Returns None when ``moment`` is not bracketed by two events.
    """

    states = np.asarray(states, dtype=int)
    i = bisect_right(list(changes), moment) - 1
    if i < 0 or i + 1 >= len(changes):
        return None
    if states[i] == 1:
        return PartOfDay.DAY

    sunset, sunrise = changes[i], changes[i + 1]
    frac = (moment - sunset).total_seconds() / (sunrise - sunset).total_seconds()
    if frac < NIGHT_QUARTER:
        return PartOfDay.EVENING
    if frac >= 1.0 - NIGHT_QUARTER:
        return PartOfDay.MORNING
    return PartOfDay.NIGHT


def sacred_part_between(moment: datetime, sunrise: datetime, next_sunrise: datetime) -> int:
    """Return which of the 18 equal sunrise-to-sunrise parts holds ``moment`` (1..18)."""

    length = (next_sunrise - sunrise).total_seconds()
    if length <= 0 or not sunrise <= moment < next_sunrise:
        raise ValueError("moment must fall between sunrise and the next sunrise")
    part = int((moment - sunrise).total_seconds() / length * SACRED_PARTS)
    return min(part, SACRED_PARTS - 1) + 1


class SkyfieldDayPart:
    """Day-part adapter backed by skyfield sunrise/sunset search."""

    def __init__(self, ts=None, ephemeris=None, ephemeris_file: str = EPHEMERIS_FILE):
        self.ts = ts if ts is not None else load.timescale()
        self.planets = ephemeris if ephemeris is not None else load(ephemeris_file)

    def _sun_function(self, latitude: float, longitude: float):
        return almanac.sunrise_sunset(self.planets, wgs84.latlon(latitude, longitude))

    def sun_events(self, moment: datetime, latitude: float, longitude: float) -> Tuple[List[datetime], np.ndarray]:
        f = self._sun_function(latitude, longitude)
        t0 = self.ts.from_datetime(moment - SEARCH_WINDOW)
        t1 = self.ts.from_datetime(moment + SEARCH_WINDOW)
        times, states = almanac.find_discrete(t0, t1, f)
        return [sf_to_utc_dt(t) for t in times], np.asarray(states, dtype=int)

    def sun_is_up(self, moment: datetime, latitude: float, longitude: float) -> bool:
        f = self._sun_function(latitude, longitude)
        return bool(f(self.ts.from_datetime(moment)))

    def classify(self, timestamp: datetime, latitude: float, longitude: float) -> PartOfDay:
        moment = as_utc(timestamp)
        changes, states = self.sun_events(moment, latitude, longitude)
        part = classify_from_events(moment, changes, states)
        if part is not None:
            return part
        # Polar day or night: no sunrise/sunset around this moment.
        return PartOfDay.DAY if self.sun_is_up(moment, latitude, longitude) else PartOfDay.NIGHT

    def sacred_part(self, timestamp: datetime, latitude: float, longitude: float) -> int:
        moment = as_utc(timestamp)
        changes, states = self.sun_events(moment, latitude, longitude)
        sunrises = [changes[k] for k in np.flatnonzero(states == 1)]
        j = bisect_right(sunrises, moment) - 1
        if j < 0 or j + 1 >= len(sunrises):
            raise RuntimeError(f"Could not find sunrises around {moment.isoformat()} at ({latitude}, {longitude})")
        return sacred_part_between(moment, sunrises[j], sunrises[j + 1])
