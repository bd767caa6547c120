"""Static HTML weekly reports, one file per week."""

import logging
from datetime import date, timedelta
from pathlib import Path
from typing import Dict, List, Optional, Union

from jinja2 import Environment, select_autoescape

from weekplanner.config.constants import REPORT_EMPTY_DAY, REPORT_FILENAME_TEMPLATE
from weekplanner.config.settings import EXPORT_CONFIG, ExportConfig
from weekplanner.core.event_model import Event
from weekplanner.core.schedule import Schedule
from weekplanner.core.weekly import group_events_by_week, group_week_by_day
from weekplanner.exceptions.errors import ExportError
from weekplanner.export.base import BaseExporter
from weekplanner.utils.formatting import format_display_date
from weekplanner.utils.paths import ensure_directory

logger = logging.getLogger(__name__)

WEEKLY_REPORT_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset='UTF-8'>
<title>{{ title }}</title>
<style>
body { font-family: Arial, sans-serif; margin: 20px; }
.schedule-container { max-width: 1200px; margin: 0 auto; }
.day-schedule { margin-bottom: 30px; }
h2 { color: #333; text-align: center; margin-bottom: 20px; }
h3 { color: #666; margin: 15px 0; }
table { border-collapse: collapse; width: 100%; table-layout: fixed; }
th, td { border: 1px solid #ddd; padding: 12px; text-align: left; }
th { background-color: #DEB8B8; color: black; font-weight: bold; }
tr:nth-child(even) { background-color: #f5f0f0; }
.time-column { width: 20%; }
.event-column { width: 50%; }
.location-column { width: 30%; }
td { white-space: nowrap; overflow: hidden; text-overflow: ellipsis; }
</style>
</head>
<body>
<div class='schedule-container'>
<h2>{{ title }}</h2>
{% for day in days %}
<div class='day-schedule'>
<h3>{{ day.heading }}</h3>
<table>
<tr>
<th class='time-column'>Time</th>
<th class='event-column'>Event</th>
<th class='location-column'>Location</th>
</tr>
{% for event in day.events %}
<tr>
<td class='time-column'>{{ event.formatted_time() }}</td>
<td class='event-column'>{{ event.title }}</td>
<td class='location-column'>{{ event.location }}</td>
</tr>
{% else %}
<tr><td colspan='3' style='text-align: center;'>{{ empty_text }}</td></tr>
{% endfor %}
</table>
</div>
{% endfor %}
</div>
</body>
</html>
"""

_environment = Environment(autoescape=select_autoescape(default_for_string=True))


def report_filename(week_start: date) -> str:
    """File name for the week starting on ``week_start``."""
    week_end = week_start + timedelta(days=6)
    return REPORT_FILENAME_TEMPLATE.format(
        week_start=week_start.isoformat(), week_end=week_end.isoformat()
    )


def render_week(week_start: date, events: List[Event]) -> str:
    """Render one week of events as an HTML document.

    Args:
        week_start: Monday of the week.
        events: Events to place; those outside the week are ignored.

    Returns:
        The HTML document.
    """
    week_end = week_start + timedelta(days=6)
    days = [
        {
            "heading": f"{day:%A}".upper() + f" - {format_display_date(day)}",
            "events": day_events,
        }
        for day, day_events in group_week_by_day(events, week_start).items()
    ]
    title = (
        f"Weekly Schedule: {format_display_date(week_start)} "
        f"to {format_display_date(week_end)}"
    )
    return _environment.from_string(WEEKLY_REPORT_TEMPLATE).render(
        title=title, days=days, empty_text=REPORT_EMPTY_DAY
    )


class HTMLReportExporter(BaseExporter):
    """Exports a schedule as one HTML page per week that has events."""

    def __init__(self, config: Optional[ExportConfig] = None) -> None:
        self._config = config or EXPORT_CONFIG
        self._documents: Optional[Dict[date, str]] = None

    def export(self, schedule: Schedule) -> Dict[date, str]:
        """Render every week of the schedule.

        Returns:
            Mapping of week-start date to HTML, ordered by week.
        """
        self._documents = {
            monday: render_week(monday, week_events)
            for monday, week_events in group_events_by_week(schedule.get_events()).items()
        }
        logger.debug(
            "Rendered %d weekly report(s) for '%s'", len(self._documents), schedule.name
        )
        return self._documents

    def save(self, output: Optional[Union[str, Path]] = None) -> List[Path]:
        """Write each rendered week into the output directory.

        Args:
            output: Directory for the files; defaults to the configured one.

        Returns:
            Paths of the written files, in week order.

        Raises:
            ExportError: If nothing was exported or the files can't be written.
        """
        if self._documents is None:
            raise ExportError("No report data. Call export() first.")

        try:
            directory = ensure_directory(output or self._config.output_dir)
            written = []
            for monday, document in self._documents.items():
                path = directory / report_filename(monday)
                path.write_text(document, encoding="utf-8")
                logger.info("Wrote weekly report %s", path)
                written.append(path)
        except OSError as exc:
            raise ExportError(f"Failed to save weekly reports: {exc}") from exc

        return written
