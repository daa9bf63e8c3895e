from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class PartOfDay(str, Enum):
    DAY = "Day"
    EVENING = "Evening"
    NIGHT = "Night"
    MORNING = "Morning"


@dataclass(frozen=True)
class Feast:
    name: str
    is_high_sabbath: bool = False


@dataclass(frozen=True)
class DayDescriptor:
    """One position in the 364-day cycle (or its Days Out of Time tail).

    ``part_of_day`` is left empty by the resolver; callers fill it in with
    ``with_part_of_day`` from a day-part adapter.
    """

    creator_day: int
    man_day: int
    month: int
    day_of_month: int
    week_day: int
    is_sabbath: bool
    is_high_sabbath: bool
    is_feast: bool
    feast_name: Optional[str]
    is_intercalary: bool
    is_day_out_of_time: bool
    is_tequfah: bool
    part_of_day: Optional[PartOfDay] = None

    def with_part_of_day(self, part: PartOfDay) -> DayDescriptor:
        return replace(self, part_of_day=PartOfDay(part))


@dataclass(frozen=True)
class LocationConfig:
    key: str
    display_name: str
    lat: float
    lon: float
    tz: str
    out_ics: str
