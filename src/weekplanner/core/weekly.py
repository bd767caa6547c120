"""Grouping of events into ISO weeks and days.

These functions never modify the events or the sequence they are given.
Both the weekly text view and the report exporters are built on them.
"""

from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List, Tuple, Union

from weekplanner.core.event_model import Event

DAYS_PER_WEEK = 7


def _as_date(value: Union[date, datetime]) -> date:
    return value.date() if isinstance(value, datetime) else value


def week_start(value: Union[date, datetime]) -> date:
    """Return the Monday on or before the given date.

    Args:
        value: Any date (or datetime) within the week.

    Returns:
        The Monday of that ISO week.
    """
    day = _as_date(value)
    return day - timedelta(days=day.weekday())


def week_bounds(value: Union[date, datetime]) -> Tuple[date, date]:
    """Return (monday, sunday) of the week containing the given date."""
    monday = week_start(value)
    return monday, monday + timedelta(days=DAYS_PER_WEEK - 1)


def week_days(value: Union[date, datetime]) -> List[date]:
    """Return the seven dates, Monday first, of the week containing value."""
    monday = week_start(value)
    return [monday + timedelta(days=offset) for offset in range(DAYS_PER_WEEK)]


def group_events_by_week(events: Iterable[Event]) -> Dict[date, List[Event]]:
    """Bucket events by the Monday of the week containing their start date.

    Buckets are ordered by week-start ascending; inside a bucket events keep
    the order they had in ``events``. Events without a start cannot be
    placed in a week and are left out.

    Args:
        events: Events to group, typically ``schedule.get_events()``.

    Returns:
        Mapping of week-start date to the events of that week.
    """
    buckets: Dict[date, List[Event]] = {}
    for event in events:
        if event is None or event.start is None:
            continue
        buckets.setdefault(week_start(event.start), []).append(event)
    return {monday: buckets[monday] for monday in sorted(buckets)}


def events_on_day(events: Iterable[Event], day: date) -> List[Event]:
    """Return the events starting on ``day``, sorted by start time.

    The sort is stable, so events with equal starts keep their input order.
    """
    matching = [
        event for event in events
        if event is not None and event.start is not None and event.start.date() == day
    ]
    return sorted(matching, key=lambda event: event.start)


def group_week_by_day(
    events: Iterable[Event], any_date: Union[date, datetime]
) -> Dict[date, List[Event]]:
    """Lay out one week as seven days, Monday first.

    Every day of the week is present in the result; days without events map
    to an empty list. Events within a day are sorted by start time.

    Args:
        events: Events to distribute.
        any_date: Any date within the target week.

    Returns:
        Ordered mapping of date to that day's events.
    """
    event_list = list(events)
    return {day: events_on_day(event_list, day) for day in week_days(any_date)}
