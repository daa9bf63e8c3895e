"""
ICS export of a Creator cycle.

One all-day event per Creator day (plus the Days Out of Time); DESCRIPTION
holds a plain-text summary of the day. Extra events can be merged from a
JSON list (see ``add_manual_events``).
"""

from __future__ import annotations

import json
import os
from datetime import date, datetime
from typing import Iterable, List, Optional, Tuple

import pytz
from ics import Calendar, Event

from .epoch import TEQUFAH_EPOCH, civil_date_of
from .model import DayDescriptor, LocationConfig
from .resolver import generate_year
from .tables import (
    DEFAULT_TEQUFAH_DAY,
    INFINITY_LEADER,
    MONTHLY_LEADERS,
    REGULAR_DAYS,
    SEASONAL_LEADERS,
    cycle_length,
    season_of,
    week_of_year,
    weekday_name,
)

# ------------------------ small formatting helpers ------------------------

def fmt_date(d: date) -> str:
    return d.strftime("%d.%m.%Y")


def plain_rows(rows: Iterable[Tuple[str, object]]) -> str:
    """Render ``(key, value)`` rows as ``key: value`` lines.

    A ``Header`` row becomes a title line followed by a blank line; rows with
    an empty value are dropped.
    """

    lines: List[str] = []
    for k, v in rows:
        k = str(k).strip()
        v = "" if v is None else str(v).strip()
        if k.lower() == "header":
            if v:
                lines.append(v)
                lines.append("")
            continue
        if k and v:
            lines.append(f"{k}: {v}")
        elif v:
            lines.append(v)
    return "\n".join(lines).strip()

# ------------------------ day rendering ------------------------

def day_title(desc: DayDescriptor, civil_date: Optional[date] = None) -> str:
    if desc.is_day_out_of_time:
        title = f"Day Out of Time {desc.creator_day - REGULAR_DAYS}"
    else:
        title = f"Month {desc.month:02d} - {desc.day_of_month:02d}"
    title += f" {weekday_name(desc.week_day)}"
    if civil_date is not None:
        title += f" ({fmt_date(civil_date)})"
    if desc.feast_name:
        title += f" - {desc.feast_name}"
    return title


def sabbath_label(desc: DayDescriptor) -> str:
    if desc.is_high_sabbath and desc.is_sabbath:
        return "Sabbath and High Sabbath"
    if desc.is_high_sabbath:
        return "High Sabbath"
    if desc.is_sabbath:
        return "Sabbath"
    return ""


def day_description(
    desc: DayDescriptor,
    civil_date: date,
    loc: LocationConfig,
    tequfah_day: int = DEFAULT_TEQUFAH_DAY,
) -> str:
    season = season_of(desc.creator_day)
    season_leader, creature, _ = SEASONAL_LEADERS[season - 1]
    if desc.is_day_out_of_time:
        month = f"Days Out of Time ({INFINITY_LEADER})"
    else:
        leader, tribe = MONTHLY_LEADERS[desc.month]
        month = f"Month {desc.month} ({leader}, tribe of {tribe})"

    rows = [
        ("Header", day_title(desc, civil_date)),
        ("Creator's count", f"Day {desc.creator_day} of {cycle_length(tequfah_day)}"),
        ("Man's count", f"Day {desc.man_day}"),
        ("Month", month),
        ("Week", f"Week {week_of_year(desc.creator_day)}, {weekday_name(desc.week_day)}"),
        ("Season", f"{season} - {season_leader} ({creature})"),
        ("Sabbath", sabbath_label(desc)),
        ("Feast", desc.feast_name),
        ("Intercalary", "Intercalary day" if desc.is_intercalary else ""),
        ("Tequfah", f"Tequfah candidate (selected: day {tequfah_day})" if desc.is_tequfah else ""),
        ("Part of day", desc.part_of_day.value if desc.part_of_day else ""),
        ("Location", loc.display_name),
    ]
    return plain_rows(rows)

# ------------------------ Manual events ------------------------

def add_manual_events(cal: Calendar, tz, uid_prefix: str, path: str) -> None:
    if not os.path.exists(path):
        return

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = f.read().strip()
        if not raw:
            return
        data = json.loads(raw)
        if not isinstance(data, list):
            raise ValueError(f"{path} must be a JSON list")

        for item in data:
            if not isinstance(item, dict) or not isinstance(item.get("name"), str):
                raise ValueError(f"manual event needs a string name: {item!r}")
            e = Event()
            e.name = f"🔹 {item['name']}"
            e.description = item.get("description", "")

            if "date" in item:
                e.begin = item["date"]
                e.make_all_day()
                e.uid = f"{uid_prefix}-{item['date']}-{item['name'].replace(' ', '')}@manual"
            elif "start" in item and "end" in item:
                tz_item = pytz.timezone(item.get("timezone", tz.zone))
                s = tz_item.localize(datetime.strptime(item["start"], "%Y-%m-%d %H:%M"))
                en = tz_item.localize(datetime.strptime(item["end"], "%Y-%m-%d %H:%M"))
                e.begin = s.astimezone(tz)
                e.end = en.astimezone(tz)
                e.uid = f"{uid_prefix}-{item['start']}-{item['name'].replace(' ', '')}@manual"
            else:
                continue

            cal.events.add(e)

    except (OSError, ValueError, KeyError, TypeError, AttributeError, pytz.UnknownTimeZoneError) as err:
        print(f"Manual event error: {err}")

# ------------------------ calendar build ------------------------

def add_cycle_events(
    cal: Calendar,
    loc: LocationConfig,
    cycle: int = 0,
    tequfah_day: int = DEFAULT_TEQUFAH_DAY,
    epoch: datetime = TEQUFAH_EPOCH,
) -> int:
    """Add one all-day event per day of ``cycle``; return how many were added."""

    days = generate_year(tequfah_day)
    for desc in days:
        d = civil_date_of(desc.creator_day, loc.tz, cycle, tequfah_day, epoch)
        ev = Event()
        ev.name = day_title(desc, d)
        ev.description = day_description(desc, d, loc, tequfah_day)
        ev.begin = d.isoformat()
        ev.make_all_day()
        ev.uid = f"{loc.key}-{cycle}-{desc.creator_day}@creator"
        cal.events.add(ev)
    return len(days)


def build_calendar(
    loc: LocationConfig,
    cycle: int = 0,
    tequfah_day: int = DEFAULT_TEQUFAH_DAY,
    epoch: datetime = TEQUFAH_EPOCH,
    manual_file: Optional[str] = None,
    cycles: int = 1,
) -> Calendar:
    cal = Calendar()
    for c in range(cycle, cycle + cycles):
        add_cycle_events(cal, loc, c, tequfah_day, epoch)
    if manual_file:
        add_manual_events(cal, pytz.timezone(loc.tz), loc.key, manual_file)
    return cal
