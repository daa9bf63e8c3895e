import json
from datetime import date

from creator_calendar import resolve_day
from creator_calendar.config import LOCATIONS
from creator_calendar.ics_export import (
    add_cycle_events,
    build_calendar,
    day_description,
    day_title,
    plain_rows,
)

JERUSALEM = LOCATIONS[0]


def by_uid(cal):
    return {e.uid: e for e in cal.events}


def test_plain_rows_drops_empty_values():
    text = plain_rows([("Header", "Title"), ("Feast", ""), ("Week", "Week 1"), ("", "free text"), ("Tequfah", None)])
    assert text == "Title\n\nWeek: Week 1\nfree text"


def test_day_titles():
    assert day_title(resolve_day(192)) == "Month 07 - 10 Day 3 - Yom Kippur"
    assert day_title(resolve_day(7), date(2025, 3, 26)) == "Month 01 - 07 Sabbath (26.03.2025)"
    assert day_title(resolve_day(366, 3)) == "Day Out of Time 2 Day 2"


def test_day_description():
    text = day_description(resolve_day(192), date(2025, 9, 27), JERUSALEM)
    assert "Creator's count: Day 192 of 365" in text
    assert "Man's count: Day 189" in text
    assert "Sabbath: High Sabbath" in text
    assert "Feast: Yom Kippur" in text
    assert "Season: 3 - Mel'eyal (Ox)" in text
    assert "tribe of Efrayim" in text
    assert "Location: Jerusalem" in text
    assert "Intercalary" not in text


def test_day_description_day_out_of_time():
    text = day_description(resolve_day(366, 3), date(2026, 3, 21), JERUSALEM, tequfah_day=3)
    assert "Creator's count: Day 366 of 366" in text
    assert "Days Out of Time (Asfa'el)" in text
    assert "Intercalary: Intercalary day" in text
    assert "Sabbath:" not in text


def test_build_calendar_one_event_per_day():
    cal = build_calendar(JERUSALEM, tequfah_day=3)
    events = by_uid(cal)
    assert len(events) == 366
    assert "jerusalem-0-1@creator" in events
    assert "jerusalem-0-366@creator" in events
    assert "Yom Kippur" in events["jerusalem-0-192@creator"].name
    assert events["jerusalem-0-1@creator"].begin.date() == date(2025, 3, 20)


def test_build_calendar_several_cycles():
    cal = build_calendar(JERUSALEM, cycle=1, cycles=2)
    events = by_uid(cal)
    assert len(events) == 730
    assert "jerusalem-1-365@creator" in events
    assert "jerusalem-2-1@creator" in events
    assert events["jerusalem-2-1@creator"].begin.date() == date(2027, 3, 20)


def test_add_cycle_events_count():
    from ics import Calendar

    cal = Calendar()
    assert add_cycle_events(cal, JERUSALEM, tequfah_day=2) == 365


def test_manual_events(tmp_path):
    path = tmp_path / "manual_events.json"
    path.write_text(
        json.dumps(
            [
                {"name": "Gathering", "date": "2025-04-01", "description": "Orchard"},
                {"name": "Radio Hour", "start": "2025-04-02 18:00", "end": "2025-04-02 19:00", "timezone": "Africa/Johannesburg"},
                {"name": "No dates"},
            ]
        ),
        encoding="utf-8",
    )
    cal = build_calendar(JERUSALEM, manual_file=str(path))
    events = by_uid(cal)
    assert len(events) == 367
    assert events["jerusalem-2025-04-01-Gathering@manual"].name == "🔹 Gathering"
    assert "jerusalem-2025-04-02 18:00-RadioHour@manual" in events


def test_manual_events_missing_file(tmp_path):
    cal = build_calendar(JERUSALEM, manual_file=str(tmp_path / "absent.json"))
    assert len(cal.events) == 365


def test_manual_events_bad_file_is_reported(tmp_path, capsys):
    path = tmp_path / "manual_events.json"
    path.write_text('{"name": "not a list"}', encoding="utf-8")
    cal = build_calendar(JERUSALEM, manual_file=str(path))
    assert len(cal.events) == 365
    assert "Manual event error" in capsys.readouterr().out


def test_manual_event_with_non_string_name_is_reported(tmp_path, capsys):
    path = tmp_path / "manual_events.json"
    path.write_text(json.dumps([{"name": 5, "date": "2025-04-01"}]), encoding="utf-8")
    cal = build_calendar(JERUSALEM, manual_file=str(path))
    assert len(cal.events) == 365
    assert "Manual event error" in capsys.readouterr().out


def test_manual_event_item_not_an_object_is_reported(tmp_path, capsys):
    path = tmp_path / "manual_events.json"
    path.write_text(json.dumps(["Gathering"]), encoding="utf-8")
    cal = build_calendar(JERUSALEM, manual_file=str(path))
    assert len(cal.events) == 365
    assert "string name" in capsys.readouterr().out
