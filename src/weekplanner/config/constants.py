"""Centralized constants for weekplanner.

Display formats, default names and export file naming live here so the
core, the exporters and the command line agree on them.
"""

# Schedule defaults
DEFAULT_SCHEDULE_NAME = "Weekly Schedule"

# Weekday names, indexed by datetime.date.weekday() (Monday == 0)
WEEKDAY_NAMES = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)

# Short aliases accepted when reading weekday names from input
WEEKDAY_ALIASES = {
    "mon": 0, "tue": 1, "tues": 1, "wed": 2, "thu": 3, "thur": 3, "thurs": 3,
    "fri": 4, "sat": 5, "sun": 6,
}

# Listing text
LISTING_HEADER = "Schedule: {name}"
LISTING_EMPTY = "No events scheduled."
LISTING_FOOTER = "End of Schedule :)"
WEEKLY_VIEW_HEADER = "Weekly Schedule ({week_start} - {week_end})"
WEEKLY_VIEW_EMPTY_DAY = "No events."

# Report export
DEFAULT_EXPORT_DIR = "weekly_schedules"
REPORT_FILENAME_TEMPLATE = "schedule_{week_start}_to_{week_end}.html"
REPORT_EMPTY_DAY = "No events scheduled"
SUPPORTED_EXPORT_FORMATS = ("html", "ics")
DEFAULT_EXPORT_FORMAT = "html"

# ICS calendar constants
ICS_PRODID = "-//WeekPlanner//Weekly Schedule//EN"
ICS_VERSION = "2.0"
ICS_CALSCALE = "GREGORIAN"
ICS_UID_DOMAIN = "weekplanner"
DEFAULT_ICS_FILENAME = "schedule.ics"

# Environment variables read by config.settings
ENV_PREFIX = "WEEKPLANNER_"
ENV_SCHEDULE_NAME = "WEEKPLANNER_SCHEDULE_NAME"
ENV_LOG_LEVEL = "WEEKPLANNER_LOG_LEVEL"
ENV_EXPORT_DIR = "WEEKPLANNER_EXPORT_DIR"
ENV_EXPORT_FORMAT = "WEEKPLANNER_EXPORT_FORMAT"
ENV_CALENDAR_NAME = "WEEKPLANNER_CALENDAR_NAME"

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
