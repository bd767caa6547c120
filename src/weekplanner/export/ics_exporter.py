"""iCalendar export of a schedule."""

import hashlib
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

from icalendar import Calendar, Event as ICalEvent, vText

from weekplanner.config.constants import (
    DEFAULT_ICS_FILENAME,
    ICS_CALSCALE,
    ICS_PRODID,
    ICS_UID_DOMAIN,
    ICS_VERSION,
)
from weekplanner.config.settings import EXPORT_CONFIG, ExportConfig
from weekplanner.core.event_model import Event
from weekplanner.core.schedule import Schedule
from weekplanner.exceptions.errors import ExportError
from weekplanner.export.base import BaseExporter
from weekplanner.utils.paths import ensure_directory, with_suffix

logger = logging.getLogger(__name__)


def generate_uid(event: Event, schedule_name: str) -> str:
    """Stable identifier for an event within a schedule.

    Args:
        event: The event; must have start and end set.
        schedule_name: Name of the owning schedule.

    Returns:
        UID string of the form ``<md5>@weekplanner``.
    """
    unique_string = (
        f"{schedule_name}-{event.title}-{event.location}-"
        f"{event.start.isoformat()}-{event.end.isoformat()}"
    )
    return hashlib.md5(unique_string.encode("utf-8")).hexdigest() + f"@{ICS_UID_DOMAIN}"


def _create_ics_calendar(calendar_name: str) -> Calendar:
    """Create a new ICS calendar with standard headers."""
    cal = Calendar()
    cal.add("PRODID", ICS_PRODID)
    cal.add("VERSION", ICS_VERSION)
    cal.add("CALSCALE", ICS_CALSCALE)
    cal.add("METHOD", "PUBLISH")
    cal.add("X-WR-CALNAME", calendar_name)
    return cal


def _create_ics_event(event: Event, schedule_name: str, stamp: datetime) -> ICalEvent:
    """Create a VEVENT; naive datetimes are written as floating local time."""
    ve = ICalEvent()
    ve.add("UID", generate_uid(event, schedule_name))
    ve.add("DTSTAMP", stamp)
    ve.add("DTSTART", event.start)
    ve.add("DTEND", event.end)
    ve.add("SUMMARY", vText(event.title or ""))
    if event.location:
        ve.add("LOCATION", vText(event.location))
    return ve


def _format_ics_output(cal: Calendar) -> str:
    """Format calendar to ICS string with CRLF line endings (RFC 5545)."""
    decoded_ical = cal.to_ical().decode("utf-8", errors="replace")
    return decoded_ical.replace("\r\n", "\n").replace("\n", "\r\n")


class ICSExporter(BaseExporter):
    """Exports a schedule as a single .ics calendar."""

    def __init__(self, config: Optional[ExportConfig] = None) -> None:
        self._config = config or EXPORT_CONFIG
        self._calendar: Optional[Calendar] = None

    def export(self, schedule: Schedule) -> Calendar:
        """Build a VCALENDAR holding one VEVENT per complete event.

        Events without a start or end are skipped with a warning.
        """
        calendar_name = schedule.name or self._config.calendar_name
        self._calendar = _create_ics_calendar(calendar_name)
        stamp = datetime.now(timezone.utc)

        skipped = 0
        for event in schedule.get_events():
            if not event.is_complete:
                skipped += 1
                logger.warning("Skipping '%s' - missing start or end time", event.title)
                continue
            self._calendar.add_component(_create_ics_event(event, calendar_name, stamp))

        logger.debug(
            "Built calendar '%s' with %d event(s), %d skipped",
            calendar_name, len(schedule) - skipped, skipped,
        )
        return self._calendar

    def to_ical(self) -> str:
        """Return the exported calendar as text.

        Raises:
            ExportError: If ``export`` has not been called.
        """
        if self._calendar is None:
            raise ExportError("No calendar data. Call export() first.")
        return _format_ics_output(self._calendar)

    def save(self, output: Optional[Union[str, Path]] = None) -> Path:
        """Write the calendar to an .ics file.

        Args:
            output: File path; defaults to ``schedule.ics`` in the configured
                output directory. ``.ics`` is appended when missing.

        Returns:
            Path of the written file.

        Raises:
            ExportError: If nothing was exported or the file can't be written.
        """
        content = self.to_ical()
        if output is None:
            path = Path(self._config.output_dir) / DEFAULT_ICS_FILENAME
        else:
            path = with_suffix(output, ".ics")

        try:
            ensure_directory(path.parent)
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(content)
        except OSError as exc:
            raise ExportError(f"Failed to save calendar to {path}: {exc}") from exc

        logger.info("Wrote calendar %s", path)
        return path
