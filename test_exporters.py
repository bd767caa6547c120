from datetime import date, datetime
from pathlib import Path

import pytest
from icalendar import Calendar

from weekplanner.config.settings import ExportConfig
from weekplanner.core.event_model import Event
from weekplanner.core.schedule import Schedule
from weekplanner.exceptions.errors import ExportError
from weekplanner.export import HTMLReportExporter, ICSExporter, get_exporter, report_filename


@pytest.fixture
def schedule() -> Schedule:
    schedule = Schedule("Work")
    schedule.add_event(Event("Planning", datetime(2026, 1, 7, 14, 0), datetime(2026, 1, 7, 15, 0), "Room <B>"))
    schedule.add_event(Event("Standup", datetime(2026, 1, 7, 9, 0), datetime(2026, 1, 7, 9, 30), "Room A"))
    schedule.add_event(Event("Review", datetime(2026, 1, 13, 10, 0), datetime(2026, 1, 13, 11, 0), "Room C"))
    return schedule


def test_report_filename_spans_monday_to_sunday() -> None:
    assert report_filename(date(2026, 1, 5)) == "schedule_2026-01-05_to_2026-01-11.html"


def test_html_export_renders_one_document_per_week(schedule: Schedule) -> None:
    documents = HTMLReportExporter().export(schedule)

    assert list(documents) == [date(2026, 1, 5), date(2026, 1, 12)]

    first_week = documents[date(2026, 1, 5)]
    assert "Weekly Schedule: Jan 5, 2026 to Jan 11, 2026" in first_week
    assert "WEDNESDAY - Jan 7, 2026" in first_week
    assert first_week.index("Standup") < first_week.index("Planning")
    assert "9:00 AM - 9:30 AM" in first_week
    assert first_week.count("No events scheduled") == 6
    assert "Review" not in first_week


def test_html_export_escapes_text(schedule: Schedule) -> None:
    document = HTMLReportExporter().export(schedule)[date(2026, 1, 5)]

    assert "Room &lt;B&gt;" in document
    assert "Room <B>" not in document


def test_html_save_writes_files_into_configured_directory(schedule: Schedule, tmp_path: Path) -> None:
    output_dir = tmp_path / "reports" / "weekly_schedules"
    exporter = HTMLReportExporter(ExportConfig(output_dir=output_dir))
    exporter.export(schedule)

    written = exporter.save()

    assert [path.name for path in written] == [
        "schedule_2026-01-05_to_2026-01-11.html",
        "schedule_2026-01-12_to_2026-01-18.html",
    ]
    assert all(path.parent == output_dir for path in written)
    assert "Review" in written[1].read_text(encoding="utf-8")


def test_save_before_export_raises() -> None:
    with pytest.raises(ExportError):
        HTMLReportExporter().save()
    with pytest.raises(ExportError):
        ICSExporter().save()


def test_html_save_wraps_os_errors(schedule: Schedule, tmp_path: Path) -> None:
    blocker = tmp_path / "file.txt"
    blocker.write_text("not a directory")
    exporter = HTMLReportExporter()
    exporter.export(schedule)

    with pytest.raises(ExportError):
        exporter.save(blocker)


def test_ics_export_contains_floating_events(schedule: Schedule) -> None:
    schedule.add_event(Event("Draft"))
    exporter = ICSExporter()
    exporter.export(schedule)

    content = exporter.to_ical()
    parsed = Calendar.from_ical(content.encode("utf-8"))
    vevents = list(parsed.walk("VEVENT"))

    assert "\r\n" in content
    assert str(parsed.get("X-WR-CALNAME")) == "Work"
    assert [str(ve.get("SUMMARY")) for ve in vevents] == ["Planning", "Standup", "Review"]
    start = vevents[1].decoded("DTSTART")
    assert start == datetime(2026, 1, 7, 9, 0)
    assert start.tzinfo is None
    assert str(vevents[1].get("LOCATION")) == "Room A"
    assert len({str(ve.get("UID")) for ve in vevents}) == 3


def test_ics_uids_are_stable_between_exports(schedule: Schedule) -> None:
    def uids() -> list:
        exporter = ICSExporter()
        calendar = exporter.export(schedule)
        return [str(ve.get("UID")) for ve in calendar.walk("VEVENT")]

    assert uids() == uids()
    assert all(uid.endswith("@weekplanner") for uid in uids())


def test_ics_save_appends_extension(schedule: Schedule, tmp_path: Path) -> None:
    exporter = ICSExporter()
    exporter.export(schedule)

    path = exporter.save(tmp_path / "my_week")

    assert path.name == "my_week.ics"
    assert path.read_bytes().startswith(b"BEGIN:VCALENDAR\r\n")


def test_get_exporter() -> None:
    assert isinstance(get_exporter("HTML"), HTMLReportExporter)
    assert isinstance(get_exporter("ics"), ICSExporter)
    with pytest.raises(ValueError):
        get_exporter("pdf")
