"""Display formatting for dates and times."""

from datetime import date, datetime
from typing import Optional


def format_display_date(value: Optional[date]) -> str:
    """Format as "Jan 5, 2026"; empty string when value is None."""
    if value is None:
        return ""
    return f"{value:%b} {value.day}, {value.year}"


def format_display_time(value: Optional[datetime]) -> str:
    """Format as "9:05 AM"; empty string when value is None."""
    if value is None:
        return ""
    hour = value.hour % 12 or 12
    return f"{hour}:{value:%M} {'AM' if value.hour < 12 else 'PM'}"


def format_day_heading(value: date) -> str:
    """Format as "Monday, Jan 5" for the weekly text view."""
    return f"{value:%A}, {value:%b} {value.day}"
