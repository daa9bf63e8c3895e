#!/usr/bin/env python3
"""
Creator calendar ICS generator.

Outputs one file per configured location (see creator_calendar.config):
- Calendar-Jerusalem.ics     (Asia/Jerusalem)
- Calendar-Johannesburg.ics  (Africa/Johannesburg)

Per calendar:
1) All-day event per Creator day of the current cycle (and CYCLES_AHEAD - 1
   following cycles), DESCRIPTION holding Creator's/Man's count, week,
   season, Sabbath/feast/intercalary/Tequfah flags.
2) The Days Out of Time after day 364 (1 when TEQUFAH_DAY=2, 2 when 3).
3) Manual events from MANUAL_FILE, if present.
"""

from __future__ import annotations

from datetime import datetime

import pytz

from creator_calendar.config import Settings, load_settings
from creator_calendar.daypart import DayPartAdapter, FixedDayPart, SkyfieldDayPart
from creator_calendar.epoch import position_at, resolve_moment
from creator_calendar.ics_export import build_calendar, day_title

UTC = pytz.UTC


def make_adapter(settings: Settings) -> DayPartAdapter:
    if settings.day_part_source == "fixed":
        return FixedDayPart()
    return SkyfieldDayPart(ephemeris_file=settings.ephemeris_file)


def main() -> None:
    settings = load_settings()
    adapter = make_adapter(settings)
    utc_now = datetime.now(UTC)
    pos = position_at(utc_now, settings.tequfah_day, settings.epoch)

    for loc in settings.locations:
        today = resolve_moment(utc_now, settings.tequfah_day, adapter, loc.lat, loc.lon, settings.epoch)
        print(
            f"{loc.display_name}: cycle {pos.cycle}, {day_title(today)}, "
            f"Creator day {today.creator_day}, Man day {today.man_day}, {today.part_of_day.value}"
        )

        cal = build_calendar(
            loc,
            cycle=pos.cycle,
            tequfah_day=settings.tequfah_day,
            epoch=settings.epoch,
            manual_file=settings.manual_file,
            cycles=settings.cycles_ahead,
        )
        with open(loc.out_ics, "w", encoding="utf-8") as f:
            f.writelines(cal.serialize_iter())
        print(f"Wrote {loc.out_ics} ({len(cal.events)} events)")


if __name__ == "__main__":
    main()
