"""Date and time parsing utilities for structured event input."""

import re
from datetime import date, datetime, time
from typing import Optional, Sequence

from dateutil import parser as dateutil_parser

from weekplanner.config.constants import WEEKDAY_ALIASES, WEEKDAY_NAMES

# Full weekday names to datetime.weekday() numbers
DAYS_OF_WEEK = {name.lower(): index for index, name in enumerate(WEEKDAY_NAMES)}


def normalize_time_string(time_str: str) -> str:
    """Handle common human formats like '20:00h' or '20h15' before parsing.

    Args:
        time_str: The time string to normalize.

    Returns:
        A normalized time string that dateutil can parse.
    """
    if not isinstance(time_str, str):
        return str(time_str)

    s = time_str.strip()

    # Convert European "20.00" to "20:00" for dateutil
    if re.match(r"^\d{1,2}\.\d{2}$", s):
        s = s.replace(".", ":")

    # Handle "20:00h", "20h", "20h15" styles
    match = re.match(r"^\s*(\d{1,2})(?:[:\.]?(\d{2}))?\s*h(?:rs?)?\.?\s*$", s, re.IGNORECASE)
    if match:
        hour = int(match.group(1))
        minute = match.group(2) or "00"
        return f"{hour:02d}:{minute}"

    match = re.match(r"^\s*(\d{1,2})h(\d{2})\s*$", s, re.IGNORECASE)
    if match:
        hour = int(match.group(1))
        minute = match.group(2)
        return f"{hour:02d}:{minute}"

    return s


def parse_date_string(date_str: str, formats: Sequence[str] = ()) -> date:
    """Parse a calendar date.

    Args:
        date_str: Date text such as "2026-01-05" or "Jan 5, 2026".
        formats: Explicit strptime formats to try; when empty, dateutil is used.

    Returns:
        The parsed date.

    Raises:
        ValueError: If the text is not a recognizable date.
    """
    text = date_str.strip() if isinstance(date_str, str) else ""
    if not text:
        raise ValueError("empty date")

    if formats:
        for fmt in formats:
            try:
                return datetime.strptime(text, fmt).date()
            except ValueError:
                continue
        raise ValueError(f"'{text}' does not match any of {list(formats)}")

    try:
        return dateutil_parser.parse(text).date()
    except (ValueError, OverflowError) as exc:
        raise ValueError(f"Cannot parse date: '{text}'") from exc


def parse_time_string(time_str: str) -> time:
    """Parse a time of day such as "9:30", "7:30 PM" or "20h15".

    Raises:
        ValueError: If the text is not a recognizable time.
    """
    text = normalize_time_string(time_str) if time_str is not None else ""
    if not text:
        raise ValueError("empty time")

    if not re.search(r"\d", text):
        raise ValueError(f"Cannot parse time: '{text}'")

    # A bare "9" means 09:00; dateutil would read it as a day of month
    if re.fullmatch(r"\d{1,2}", text):
        text = f"{int(text):02d}:00"

    try:
        return dateutil_parser.parse(text).time().replace(second=0, microsecond=0)
    except (ValueError, OverflowError) as exc:
        raise ValueError(f"Cannot parse time: '{text}'") from exc


def parse_weekday(value) -> Optional[int]:
    """Map a weekday name, alias or number (0=Monday) to datetime.weekday().

    Args:
        value: "monday", "Mon", 0..6, or a numeric string.

    Returns:
        Weekday number, or None if the value is not recognized.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if 0 <= value <= 6 else None

    text = str(value).strip().lower()
    if text.isdigit():
        number = int(text)
        return number if 0 <= number <= 6 else None
    if text in DAYS_OF_WEEK:
        return DAYS_OF_WEEK[text]
    return WEEKDAY_ALIASES.get(text)
