"""Turning raw form or file input into events and recurrence rules.

The core model accepts any Event. Field validation happens here, before
an event ever reaches ``Schedule.add_event``.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Set, Tuple

from weekplanner.core.event_model import Event
from weekplanner.core.recurrence import RecurrenceRule
from weekplanner.exceptions.errors import EventValidationError, RecurrenceError
from weekplanner.utils.date_parsing import (
    parse_date_string,
    parse_time_string,
    parse_weekday,
)

logger = logging.getLogger(__name__)

# Required keys for event_from_dict
REQUIRED_EVENT_FIELDS = {"title", "location", "date", "start_time", "end_time"}


@dataclass(frozen=True)
class EventValidationPolicy:
    """How strictly to validate event input.

    Attributes:
        require_title: Reject blank titles.
        require_location: Reject blank locations.
        allow_inverted: Accept events whose end is before their start.
        date_formats: strptime formats for dates; empty means dateutil parsing.
    """

    require_title: bool = True
    require_location: bool = True
    allow_inverted: bool = False
    date_formats: Tuple[str, ...] = ()


DEFAULT_POLICY = EventValidationPolicy()


def _clean(value) -> str:
    return str(value).strip() if value is not None else ""


def parse_event_fields(
    title: str,
    location: str,
    date: str,
    start_time: str,
    end_time: str,
    end_date: Optional[str] = None,
    policy: Optional[EventValidationPolicy] = None,
) -> Event:
    """Validate form fields and build an Event.

    Args:
        title: Event title.
        location: Event location.
        date: Start date text.
        start_time: Start time text, e.g. "9:00" or "7:30 PM".
        end_time: End time text.
        end_date: End date text; defaults to ``date``.
        policy: Validation policy; defaults to ``DEFAULT_POLICY``.

    Returns:
        The parsed Event.

    Raises:
        EventValidationError: If a field is missing, unparseable, or the
            interval is inverted and the policy does not allow it.
    """
    policy = policy or DEFAULT_POLICY
    title = _clean(title)
    location = _clean(location)

    missing: Set[str] = set()
    if policy.require_title and not title:
        missing.add("title")
    if policy.require_location and not location:
        missing.add("location")
    for name, value in (("date", date), ("start_time", start_time), ("end_time", end_time)):
        if not _clean(value):
            missing.add(name)
    if missing:
        raise EventValidationError(missing_fields=missing, event_title=title or None)

    try:
        start_day = parse_date_string(_clean(date), policy.date_formats)
        end_day = (
            parse_date_string(_clean(end_date), policy.date_formats)
            if _clean(end_date) else start_day
        )
        start = datetime.combine(start_day, parse_time_string(_clean(start_time)))
        end = datetime.combine(end_day, parse_time_string(_clean(end_time)))
    except ValueError as exc:
        raise EventValidationError(event_title=title or None, reason=str(exc)) from exc

    if end < start and not policy.allow_inverted:
        raise EventValidationError(
            event_title=title or None,
            reason=f"ends ({end:%Y-%m-%d %H:%M}) before it starts ({start:%Y-%m-%d %H:%M})",
        )

    return Event(title=title, start=start, end=end, location=location)


def event_from_dict(data: Dict, policy: Optional[EventValidationPolicy] = None) -> Event:
    """Create an Event from a mapping with REQUIRED_EVENT_FIELDS keys.

    Raises:
        EventValidationError: If keys are missing or values are invalid.
    """
    missing = REQUIRED_EVENT_FIELDS - set(data.keys())
    if missing:
        raise EventValidationError(
            missing_fields=missing,
            event_title=data.get("title", "Unknown"),
        )
    return parse_event_fields(
        title=data["title"],
        location=data["location"],
        date=data["date"],
        start_time=data["start_time"],
        end_time=data["end_time"],
        end_date=data.get("end_date"),
        policy=policy,
    )


def parse_days(values: Iterable) -> Set[int]:
    """Convert weekday names or numbers to weekday numbers.

    Raises:
        RecurrenceError: If a value is not a weekday.
    """
    if isinstance(values, (str, int)):
        values = [values]

    days: Set[int] = set()
    for value in values:
        day = parse_weekday(value)
        if day is None:
            raise RecurrenceError(f"Unknown weekday: {value!r}")
        days.add(day)
    return days


def rule_from_dict(data: Dict, policy: Optional[EventValidationPolicy] = None) -> RecurrenceRule:
    """Create a RecurrenceRule from a mapping.

    The mapping has the event keys plus ``days``; the series runs from
    ``date`` to ``end_date`` (or just ``date``) inclusive. An empty ``days``
    list gives a rule that generates nothing.

    Every occurrence takes the template's time of day, so the times are
    checked on their own as well as across the whole series.

    Raises:
        EventValidationError: If the template fields are invalid, or each
            occurrence would end before it starts and the policy does not
            allow it.
        RecurrenceError: If ``days`` holds something that is not a weekday.
    """
    policy = policy or DEFAULT_POLICY
    days = parse_days(data.get("days") or [])
    template = event_from_dict(data, policy)
    if not policy.allow_inverted and template.end.time() < template.start.time():
        raise EventValidationError(
            event_title=template.title or None,
            reason=(
                f"each occurrence ends ({template.end:%H:%M}) "
                f"before it starts ({template.start:%H:%M})"
            ),
        )
    return RecurrenceRule.from_event(template, days)


def load_entries(
    entries: Iterable[Dict], policy: Optional[EventValidationPolicy] = None
) -> List[List[Event]]:
    """Parse a list of event/recurrence mappings.

    Entries with a ``days`` key are expanded into their occurrences, other
    entries become a single event.

    Returns:
        One list of events per entry, in input order.

    Raises:
        EventValidationError: If an entry is invalid.
        RecurrenceError: If an entry has invalid weekdays.
    """
    parsed: List[List[Event]] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise EventValidationError(
                event_title=f"Entry {index + 1}",
                reason=f"expected an object, got {type(entry).__name__}",
            )
        if "days" in entry:
            rule = rule_from_dict(entry, policy)
            occurrences = rule.generate_occurrences()
            if not occurrences:
                logger.warning(
                    "Recurring entry '%s' produced no occurrences", entry.get("title")
                )
            parsed.append(occurrences)
        else:
            parsed.append([event_from_dict(entry, policy)])
    return parsed
