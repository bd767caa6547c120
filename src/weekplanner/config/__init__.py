"""Configuration module for weekplanner."""

from weekplanner.config.settings import (
    EXPORT_CONFIG,
    SCHEDULE_CONFIG,
    ExportConfig,
    ScheduleConfig,
    load_settings,
)
from weekplanner.config.constants import (
    DEFAULT_SCHEDULE_NAME,
    DEFAULT_EXPORT_DIR,
    REPORT_FILENAME_TEMPLATE,
    ICS_PRODID,
    WEEKDAY_NAMES,
)

__all__ = [
    "EXPORT_CONFIG",
    "SCHEDULE_CONFIG",
    "ExportConfig",
    "ScheduleConfig",
    "load_settings",
    "DEFAULT_SCHEDULE_NAME",
    "DEFAULT_EXPORT_DIR",
    "REPORT_FILENAME_TEMPLATE",
    "ICS_PRODID",
    "WEEKDAY_NAMES",
]
