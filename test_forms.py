from datetime import date, datetime, time

import pytest

from weekplanner.core.forms import (
    EventValidationPolicy,
    event_from_dict,
    load_entries,
    parse_days,
    parse_event_fields,
    rule_from_dict,
)
from weekplanner.exceptions.errors import EventValidationError, RecurrenceError
from weekplanner.utils.date_parsing import normalize_time_string, parse_time_string


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("20.00", "20:00"),
        ("20:00h", "20:00"),
        ("20h", "20:00"),
        ("20h15", "20:15"),
        ("  7:30 PM ", "7:30 PM"),
    ],
)
def test_normalize_time_string(raw: str, expected: str) -> None:
    assert normalize_time_string(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [("9", time(9, 0)), ("9:30", time(9, 30)), ("7:30 PM", time(19, 30)), ("20h15", time(20, 15))],
)
def test_parse_time_string(raw: str, expected: time) -> None:
    assert parse_time_string(raw) == expected


def test_parse_event_fields_builds_event() -> None:
    event = parse_event_fields(" Standup ", "Room 1", "2026-01-05", "9:00", "9:30 AM")

    assert event.title == "Standup"
    assert event.start == datetime(2026, 1, 5, 9, 0)
    assert event.end == datetime(2026, 1, 5, 9, 30)


def test_parse_event_fields_reports_all_missing_fields() -> None:
    with pytest.raises(EventValidationError) as exc_info:
        parse_event_fields("", "  ", "2026-01-05", "", "10:00")

    assert exc_info.value.missing_fields == ["location", "start_time", "title"]


def test_policy_can_relax_required_text_fields() -> None:
    policy = EventValidationPolicy(require_title=False, require_location=False)

    event = parse_event_fields("", "", "2026-01-05", "9:00", "10:00", policy=policy)

    assert (event.title, event.location) == ("", "")


def test_unparseable_values_raise_validation_error() -> None:
    with pytest.raises(EventValidationError, match="Cannot parse time"):
        parse_event_fields("Standup", "Room", "2026-01-05", "later", "10:00")

    with pytest.raises(EventValidationError):
        parse_event_fields("Standup", "Room", "not a date", "9:00", "10:00")


def test_inverted_interval_depends_on_policy() -> None:
    with pytest.raises(EventValidationError, match="before it starts"):
        parse_event_fields("Backwards", "Room", "2026-01-05", "10:00", "9:00")

    event = parse_event_fields(
        "Backwards", "Room", "2026-01-05", "10:00", "9:00",
        policy=EventValidationPolicy(allow_inverted=True),
    )
    assert event.end < event.start


def test_explicit_date_formats() -> None:
    policy = EventValidationPolicy(date_formats=("%d/%m/%Y",))

    event = parse_event_fields("Dentist", "Clinic", "07/01/2026", "14:00", "15:00", policy=policy)
    assert event.start.date() == date(2026, 1, 7)

    with pytest.raises(EventValidationError):
        parse_event_fields("Dentist", "Clinic", "2026-01-07", "14:00", "15:00", policy=policy)


def test_event_from_dict_requires_keys() -> None:
    with pytest.raises(EventValidationError) as exc_info:
        event_from_dict({"title": "Partial", "date": "2026-01-05"})

    assert exc_info.value.event_title == "Partial"
    assert "end_time" in exc_info.value.missing_fields


def test_event_from_dict_with_end_date() -> None:
    event = event_from_dict({
        "title": "Trip", "location": "Coast", "date": "2026-01-09",
        "start_time": "18:00", "end_time": "10:00", "end_date": "2026-01-11",
    })

    assert event.end == datetime(2026, 1, 11, 10, 0)


def test_parse_days_accepts_names_aliases_and_numbers() -> None:
    assert parse_days(["Monday", "wed", 4, "6"]) == {0, 2, 4, 6}
    assert parse_days("friday") == {4}

    with pytest.raises(RecurrenceError):
        parse_days(["someday"])
    with pytest.raises(RecurrenceError):
        parse_days([7])


def test_rule_from_dict_expands_over_date_range() -> None:
    rule = rule_from_dict({
        "title": "Sync", "location": "Room", "date": "2026-01-05", "end_date": "2026-01-18",
        "start_time": "9:00", "end_time": "9:30", "days": ["monday", "wednesday"],
    })

    assert [event.start.day for event in rule.generate_occurrences()] == [5, 7, 12, 14]


def test_rule_from_dict_rejects_inverted_daily_times() -> None:
    entry = {
        "title": "Backwards", "location": "Room", "date": "2026-01-05", "end_date": "2026-01-18",
        "start_time": "10:00", "end_time": "9:00", "days": ["monday"],
    }

    with pytest.raises(EventValidationError, match="before it starts"):
        rule_from_dict(entry)

    rule = rule_from_dict(entry, EventValidationPolicy(allow_inverted=True))
    assert all(event.end < event.start for event in rule.generate_occurrences())


def test_load_entries_mixes_single_and_recurring() -> None:
    entries = [
        {"title": "One", "location": "A", "date": "2026-01-05", "start_time": "8:00", "end_time": "9:00"},
        {"title": "Many", "location": "B", "date": "2026-01-05", "end_date": "2026-01-11",
         "start_time": "12:00", "end_time": "13:00", "days": ["tue", "thu"]},
        {"title": "None", "location": "C", "date": "2026-01-05",
         "start_time": "12:00", "end_time": "13:00", "days": []},
    ]

    parsed = load_entries(entries)

    assert [len(group) for group in parsed] == [1, 2, 0]


def test_load_entries_rejects_non_objects() -> None:
    with pytest.raises(EventValidationError, match="expected an object"):
        load_entries([["not", "a", "dict"]])
