"""Weekly recurrence rules that expand into plain events."""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import FrozenSet, Iterable, List, Optional

from weekplanner.core.event_model import Event

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecurrenceRule:
    """Days of the week plus an inclusive date range, applied to a template.

    Only the title, location and the time of day of the template's start
    and end are used. Weekdays follow ``date.weekday()`` (Monday == 0).
    """

    template: Event
    days_of_week: FrozenSet[int] = field(default_factory=frozenset)
    series_start: Optional[date] = None
    series_end: Optional[date] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "days_of_week", frozenset(self.days_of_week))

    @classmethod
    def from_event(cls, event: Event, days_of_week: Iterable[int]) -> "RecurrenceRule":
        """Use an event's start and end dates as the series range.

        An event spanning Jan 5 09:00 to Jan 30 09:30 becomes a rule for
        09:00-09:30 on every selected weekday from Jan 5 to Jan 30.
        """
        return cls(
            template=event,
            days_of_week=frozenset(days_of_week),
            series_start=event.start.date() if event.start is not None else None,
            series_end=event.end.date() if event.end is not None else None,
        )

    def generate_occurrences(self) -> List[Event]:
        """Expand the rule into one event per matching date, oldest first.

        No overlap checking happens here. An empty weekday set, an inverted
        date range or a template without start/end yields an empty list.

        Returns:
            The generated occurrences.
        """
        if self.template.start is None or self.template.end is None:
            logger.warning(
                "Recurrence template '%s' has no start or end time; nothing generated",
                self.template.title,
            )
            return []
        if self.series_start is None or self.series_end is None:
            return []

        start_time = self.template.start.time()
        end_time = self.template.end.time()
        occurrences: List[Event] = []

        current = self.series_start
        while current <= self.series_end:
            if current.weekday() in self.days_of_week:
                occurrences.append(Event(
                    title=self.template.title,
                    start=datetime.combine(current, start_time),
                    end=datetime.combine(current, end_time),
                    location=self.template.location,
                ))
            current += timedelta(days=1)

        logger.debug(
            "Expanded '%s' into %d occurrence(s) between %s and %s",
            self.template.title, len(occurrences), self.series_start, self.series_end,
        )
        return occurrences
