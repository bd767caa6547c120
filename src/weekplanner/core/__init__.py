"""Core scheduling model for weekplanner."""

from weekplanner.core.event_model import Event
from weekplanner.core.forms import (
    EventValidationPolicy,
    event_from_dict,
    parse_event_fields,
    rule_from_dict,
)
from weekplanner.core.intervals import intervals_overlap
from weekplanner.core.manager import ScheduleManager
from weekplanner.core.recurrence import RecurrenceRule
from weekplanner.core.schedule import Schedule
from weekplanner.core.weekly import (
    group_events_by_week,
    group_week_by_day,
    week_bounds,
    week_start,
)

__all__ = [
    "Event",
    "EventValidationPolicy",
    "event_from_dict",
    "parse_event_fields",
    "rule_from_dict",
    "intervals_overlap",
    "ScheduleManager",
    "RecurrenceRule",
    "Schedule",
    "group_events_by_week",
    "group_week_by_day",
    "week_bounds",
    "week_start",
]
