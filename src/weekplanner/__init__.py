"""
weekplanner - Personal weekly scheduling

Keeps a named schedule free of double-bookings, expands weekly recurring
events into concrete occurrences, and groups events by week and day for
the text view and the HTML/iCalendar exports.
"""

__version__ = "1.0.0"

# Public API - import commonly used components
from weekplanner.config.settings import EXPORT_CONFIG, SCHEDULE_CONFIG, load_settings
from weekplanner.exceptions.errors import (
    ConfigurationError,
    EventValidationError,
    ExportError,
    RecurrenceError,
    WeekPlannerError,
)
from weekplanner.core.event_model import Event
from weekplanner.core.forms import EventValidationPolicy, parse_event_fields
from weekplanner.core.manager import ScheduleManager
from weekplanner.core.recurrence import RecurrenceRule
from weekplanner.core.schedule import Schedule
from weekplanner.core.weekly import (
    group_events_by_week,
    group_week_by_day,
    week_bounds,
    week_start,
)
from weekplanner.export import HTMLReportExporter, ICSExporter

__all__ = [
    # Version
    "__version__",
    # Config
    "EXPORT_CONFIG",
    "SCHEDULE_CONFIG",
    "load_settings",
    # Exceptions
    "ConfigurationError",
    "EventValidationError",
    "ExportError",
    "RecurrenceError",
    "WeekPlannerError",
    # Core
    "Event",
    "EventValidationPolicy",
    "parse_event_fields",
    "ScheduleManager",
    "RecurrenceRule",
    "Schedule",
    "group_events_by_week",
    "group_week_by_day",
    "week_bounds",
    "week_start",
    # Export
    "HTMLReportExporter",
    "ICSExporter",
]
