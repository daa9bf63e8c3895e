"""
Static tables of the Creator calendar.

- 12 months of 30/31 days making up 364 Creator days
- feast days (one high Sabbath: Yom Kippur)
- four intercalary days, the 31st of months 3, 6, 10 and 12
- two Tequfah candidate days in month 7, whose selector decides how many
  Days Out of Time follow day 364

Everything here is built once at import and never mutated.
"""

from __future__ import annotations

from bisect import bisect_left
from itertools import accumulate
from types import MappingProxyType
from typing import Dict, FrozenSet, Mapping, Optional, Tuple

from .errors import ConfigurationError
from .model import Feast

REGULAR_DAYS = 364
DAYS_IN_WEEK = 7
MAN_COUNT_OFFSET = 3  # Creator day 4 == Man day 1
DEFAULT_TEQUFAH_DAY = 2

# --- MonthTable ---

MONTH_LENGTHS: Tuple[int, ...] = (30, 30, 31, 30, 30, 31, 30, 30, 30, 31, 30, 31)
CUMULATIVE_DAYS: Tuple[int, ...] = tuple(accumulate(MONTH_LENGTHS))

if CUMULATIVE_DAYS[-1] != REGULAR_DAYS:
    raise RuntimeError(f"Month lengths sum to {CUMULATIVE_DAYS[-1]}, expected {REGULAR_DAYS}")


def _check_month(month: int) -> None:
    if not 1 <= month <= len(MONTH_LENGTHS):
        raise ValueError("month out of range")


def month_length(month: int) -> int:
    _check_month(month)
    return MONTH_LENGTHS[month - 1]


def days_before_month(month: int) -> int:
    """Number of Creator days that precede day 1 of ``month``."""

    _check_month(month)
    return CUMULATIVE_DAYS[month - 2] if month > 1 else 0


def locate(creator_day: int) -> Tuple[int, int]:
    """Return ``(month, day_of_month)`` for a regular Creator day 1..364.

    The first month whose cumulative total reaches ``creator_day`` wins, so
    the last day of a month never spills into the next one.
    """

    if not 1 <= creator_day <= REGULAR_DAYS:
        raise ValueError("creator day out of range")
    i = bisect_left(CUMULATIVE_DAYS, creator_day)
    month = i + 1
    return month, creator_day - days_before_month(month)


# --- FeastCalendar ---

def _feasts() -> Dict[Tuple[int, int], Feast]:
    table = {
        (1, 1): Feast("New Year"),
        (1, 15): Feast("Unleavened Bread (1st day)"),
        (1, 21): Feast("Unleavened Bread (last day)"),
        (3, 15): Feast("Shavuot (1st Feast of Weeks)"),
        (5, 3): Feast("Feast of New Wine"),
        (6, 22): Feast("Feast of New Oil"),
        (7, 1): Feast("Yom Teruah"),
        (7, 10): Feast("Yom Kippur", is_high_sabbath=True),
        (7, 15): Feast("Sukkot (1st day)"),
        (7, 22): Feast("Shemini Atzeret (Simchat Torah)"),
    }
    for m in (2, 3, 4, 5, 6, 8, 9, 10, 11, 12):
        table[(m, 1)] = Feast("New Month Feast")
    return table


FEAST_DAYS: Mapping[Tuple[int, int], Feast] = MappingProxyType(_feasts())


def lookup_feast(month: int, day_of_month: int) -> Optional[Feast]:
    return FEAST_DAYS.get((month, day_of_month))


# --- IntercalaryRule / TequfahRule ---

INTERCALARY_DAYS: FrozenSet[Tuple[int, int]] = frozenset({(3, 31), (6, 31), (10, 31), (12, 31)})

# Straight-shadow (equinox) day: month 7, day 2 or 3
TEQUFAH_MONTH = 7
TEQUFAH_DAYS: Tuple[int, ...] = (2, 3)


def is_intercalary(month: int, day_of_month: int) -> bool:
    return (month, day_of_month) in INTERCALARY_DAYS


def is_tequfah(month: int, day_of_month: int) -> bool:
    return month == TEQUFAH_MONTH and day_of_month in TEQUFAH_DAYS


def days_out_of_time(tequfah_day: int) -> int:
    """One Day Out of Time when the Tequfah falls on day 2, otherwise two."""

    if tequfah_day not in TEQUFAH_DAYS:
        raise ConfigurationError(
            f"Tequfah day must be one of {TEQUFAH_DAYS}, got {tequfah_day!r}",
            setting="tequfah_day",
            value=tequfah_day,
        )
    return 1 if tequfah_day == 2 else 2


def cycle_length(tequfah_day: int) -> int:
    return REGULAR_DAYS + days_out_of_time(tequfah_day)


# --- Wheel data: weeks, seasons and leaders ---

WEEKDAY_NAMES = ("Day 1", "Day 2", "Day 3", "Day 4", "Day 5", "Day 6", "Sabbath")

DAYS_PER_SEASON = 91

# (leader, creature of Ezekiel's vision, months)
SEASONAL_LEADERS = (
    ("Malki'el", "Lion", (1, 2, 3)),
    ("Hemel-Melek", "Man", (4, 5, 6)),
    ("Mel'eyal", "Ox", (7, 8, 9)),
    ("Nar'el", "Eagle", (10, 11, 12)),
)

# month -> (leader, tribe)
MONTHLY_LEADERS = {
    1: ("Adnar'el", "Yehudah"),
    2: ("Yahsu-sa'el", "Yissachar"),
    3: ("Olam'el", "Zevulun"),
    4: ("Barak'el", "Re'uven"),
    5: ("Zelebsa'el", "Shimon"),
    6: ("Hilah-Yahseph", "Gad"),
    7: ("Adnar'el", "Efrayim"),
    8: ("Yahsusa'el", "Menasheh"),
    9: ("Elomi'el", "Binyamin"),
    10: ("Barka'el", "Dan"),
    11: ("Gida'yi'el", "Asher"),
    12: ("Ki'el", "Naftali"),
}

INFINITY_LEADER = "Asfa'el"


def weekday_name(week_day: int) -> str:
    return WEEKDAY_NAMES[week_day - 1]


def season_of(creator_day: int) -> int:
    """Return the season 1..4; Days Out of Time stay in the last season."""

    return min((creator_day - 1) // DAYS_PER_SEASON + 1, len(SEASONAL_LEADERS))


def week_of_year(creator_day: int) -> int:
    return (creator_day + DAYS_IN_WEEK - 1) // DAYS_IN_WEEK
