"""Utility functions for weekplanner."""

from weekplanner.utils.date_parsing import (
    normalize_time_string,
    parse_date_string,
    parse_time_string,
    parse_weekday,
)
from weekplanner.utils.formatting import (
    format_day_heading,
    format_display_date,
    format_display_time,
)
from weekplanner.utils.paths import ensure_directory

__all__ = [
    "normalize_time_string",
    "parse_date_string",
    "parse_time_string",
    "parse_weekday",
    "format_day_heading",
    "format_display_date",
    "format_display_time",
    "ensure_directory",
]
