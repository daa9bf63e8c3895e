"""Creator-day resolution.

``resolve_day`` turns a Creator-day index into a ``DayDescriptor`` and
``generate_year`` lists a whole cycle of them. Both are pure: they only read
the static tables and hand back fresh values.
"""

from __future__ import annotations

import numbers
from typing import List

from .errors import DomainRangeError
from .model import DayDescriptor
from .tables import (
    DAYS_IN_WEEK,
    DEFAULT_TEQUFAH_DAY,
    MAN_COUNT_OFFSET,
    REGULAR_DAYS,
    cycle_length,
    days_out_of_time,
    is_intercalary,
    is_tequfah,
    locate,
    lookup_feast,
)


def week_day_of(creator_day: int) -> int:
    # The week never pauses, not even for the Days Out of Time.
    return (creator_day - 1) % DAYS_IN_WEEK + 1


def man_day_of(creator_day: int) -> int:
    """Man's count: Creator day 4 is Man day 1.

    Creator days 1..3 close the previous cycle under Man's count (362..364),
    and the Days Out of Time continue from 363.
    """

    if creator_day > REGULAR_DAYS:
        return REGULAR_DAYS - MAN_COUNT_OFFSET + 1 + (creator_day - REGULAR_DAYS)
    if creator_day > MAN_COUNT_OFFSET:
        return creator_day - MAN_COUNT_OFFSET
    return REGULAR_DAYS + (creator_day - MAN_COUNT_OFFSET)


def check_creator_day(creator_day, max_day: int) -> int:
    """Return ``creator_day`` as an int in 1..max_day or raise ``DomainRangeError``."""

    if isinstance(creator_day, bool) or not isinstance(creator_day, numbers.Integral):
        raise DomainRangeError(creator_day, max_day)
    creator_day = int(creator_day)
    if not 1 <= creator_day <= max_day:
        raise DomainRangeError(creator_day, max_day)
    return creator_day


def resolve_day(creator_day: int, tequfah_day: int = DEFAULT_TEQUFAH_DAY) -> DayDescriptor:
    extra = days_out_of_time(tequfah_day)
    creator_day = check_creator_day(creator_day, REGULAR_DAYS + extra)

    week_day = week_day_of(creator_day)

    if creator_day > REGULAR_DAYS:
        i = creator_day - REGULAR_DAYS
        # Outside the month structure; day_of_month only continues the display.
        return DayDescriptor(
            creator_day=creator_day,
            man_day=man_day_of(creator_day),
            month=12,
            day_of_month=28 + i,
            week_day=week_day,
            is_sabbath=False,
            is_high_sabbath=False,
            is_feast=False,
            feast_name=None,
            is_intercalary=i == extra,
            is_day_out_of_time=True,
            is_tequfah=False,
        )

    month, day_of_month = locate(creator_day)
    feast = lookup_feast(month, day_of_month)
    return DayDescriptor(
        creator_day=creator_day,
        man_day=man_day_of(creator_day),
        month=month,
        day_of_month=day_of_month,
        week_day=week_day,
        is_sabbath=week_day == DAYS_IN_WEEK,
        is_high_sabbath=feast.is_high_sabbath if feast else False,
        is_feast=feast is not None,
        feast_name=feast.name if feast else None,
        is_intercalary=is_intercalary(month, day_of_month),
        is_day_out_of_time=False,
        is_tequfah=is_tequfah(month, day_of_month),
    )


def generate_year(tequfah_day: int = DEFAULT_TEQUFAH_DAY) -> List[DayDescriptor]:
    """Return every day of one cycle: 364 Creator days plus 1 or 2 Days Out of Time."""

    return [resolve_day(n, tequfah_day) for n in range(1, cycle_length(tequfah_day) + 1)]
