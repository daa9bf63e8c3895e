"""
Environment-driven settings.

TEQUFAH_DAY      2 or 3 (default 2)
CREATOR_EPOCH    ISO-8601 instant of Creator day 1 (default: 2025 spring Tequfah)
CYCLES_AHEAD     cycles written per calendar file (default 1)
MANUAL_FILE      JSON list of extra events (default manual_events.json)
EPHEMERIS_FILE   skyfield ephemeris (default de421.bsp)
DAY_PART_SOURCE  "skyfield" or "fixed" (default skyfield)
LOCATIONS        comma-separated location keys (default: all)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime
from typing import Mapping, Optional, Tuple

import pytz

from .daypart import EPHEMERIS_FILE, as_utc
from .epoch import TEQUFAH_EPOCH
from .errors import ConfigurationError
from .model import LocationConfig
from .tables import DEFAULT_TEQUFAH_DAY, days_out_of_time

LOCATIONS = (
    LocationConfig("jerusalem", "Jerusalem", 31.7683, 35.2137, "Asia/Jerusalem", "Calendar-Jerusalem.ics"),
    LocationConfig("johannesburg", "Johannesburg, South Africa", -26.2041, 28.0473, "Africa/Johannesburg", "Calendar-Johannesburg.ics"),
)

DAY_PART_SOURCES = ("skyfield", "fixed")


@dataclass(frozen=True)
class Settings:
    tequfah_day: int = DEFAULT_TEQUFAH_DAY
    epoch: datetime = TEQUFAH_EPOCH
    cycles_ahead: int = 1
    manual_file: str = "manual_events.json"
    ephemeris_file: str = EPHEMERIS_FILE
    day_part_source: str = "skyfield"
    locations: Tuple[LocationConfig, ...] = LOCATIONS


def _int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}", setting=name, value=raw) from exc


def _epoch(environ: Mapping[str, str]) -> datetime:
    raw = environ.get("CREATOR_EPOCH", "").strip()
    if not raw:
        return TEQUFAH_EPOCH
    try:
        return as_utc(datetime.fromisoformat(raw.replace("Z", "+00:00")))
    except ValueError as exc:
        raise ConfigurationError(f"CREATOR_EPOCH is not ISO-8601: {raw!r}", setting="CREATOR_EPOCH", value=raw) from exc


def _locations(environ: Mapping[str, str]) -> Tuple[LocationConfig, ...]:
    raw = environ.get("LOCATIONS", "").strip()
    if not raw:
        selected = LOCATIONS
    else:
        by_key = {loc.key: loc for loc in LOCATIONS}
        keys = [k.strip().lower() for k in raw.split(",") if k.strip()]
        unknown = [k for k in keys if k not in by_key]
        if unknown:
            raise ConfigurationError(f"Unknown location(s): {', '.join(unknown)}", setting="LOCATIONS", value=raw)
        selected = tuple(by_key[k] for k in keys)
    for loc in selected:
        try:
            pytz.timezone(loc.tz)
        except pytz.UnknownTimeZoneError as exc:
            raise ConfigurationError(f"Unknown timezone {loc.tz!r} for {loc.key}", setting="LOCATIONS", value=loc.tz) from exc
    return selected


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ

    tequfah_day = _int(env, "TEQUFAH_DAY", DEFAULT_TEQUFAH_DAY)
    days_out_of_time(tequfah_day)  # validation

    cycles_ahead = _int(env, "CYCLES_AHEAD", 1)
    if cycles_ahead < 1:
        raise ConfigurationError("CYCLES_AHEAD must be at least 1", setting="CYCLES_AHEAD", value=cycles_ahead)

    source = env.get("DAY_PART_SOURCE", "skyfield").strip().lower()
    if source not in DAY_PART_SOURCES:
        raise ConfigurationError(f"DAY_PART_SOURCE must be one of {DAY_PART_SOURCES}", setting="DAY_PART_SOURCE", value=source)

    return Settings(
        tequfah_day=tequfah_day,
        epoch=_epoch(env),
        cycles_ahead=cycles_ahead,
        manual_file=env.get("MANUAL_FILE", "manual_events.json"),
        ephemeris_file=env.get("EPHEMERIS_FILE", EPHEMERIS_FILE),
        day_part_source=source,
        locations=_locations(env),
    )
