"""A named collection of non-overlapping events."""

import logging
from datetime import date, datetime
from typing import Iterable, List, Optional, Union

from weekplanner.config.constants import (
    LISTING_EMPTY,
    LISTING_FOOTER,
    LISTING_HEADER,
    WEEKLY_VIEW_EMPTY_DAY,
    WEEKLY_VIEW_HEADER,
)
from weekplanner.core.event_model import Event
from weekplanner.core.weekly import group_week_by_day, week_bounds
from weekplanner.utils.formatting import format_day_heading

logger = logging.getLogger(__name__)


class Schedule:
    """An ordered collection of events for one named calendar.

    ``add_event`` is the only gate that keeps the events free of overlaps.
    The list returned by ``get_events`` is the live list; appending to it
    directly bypasses that gate.

    A Schedule performs no locking. Callers sharing one between threads
    must serialize access themselves.
    """

    def __init__(self, name: str):
        self.name = name
        self._events: List[Event] = []

    def add_event(self, event: Optional[Event]) -> bool:
        """Add an event if it does not overlap any stored event.

        Args:
            event: The event to add.

        Returns:
            True if the event was added, False if it was None or overlaps.
        """
        if event is None:
            return False
        if event.is_overlapping(self._events):
            logger.warning(
                "Event overlaps with an existing event: '%s' (%s)",
                event.title,
                event.formatted_range(),
            )
            return False
        self._events.append(event)
        return True

    def add_events(self, events: Iterable[Event]) -> List[bool]:
        """Offer events one at a time, in order.

        This is not a transaction: events accepted before a rejection stay
        in the schedule.

        Returns:
            One result per event, in input order.
        """
        results = [self.add_event(event) for event in events]
        logger.debug(
            "Batch insert into '%s': %d of %d accepted",
            self.name, sum(results), len(results),
        )
        return results

    def remove_event(self, title: str) -> bool:
        """Remove the first event whose title matches, ignoring case.

        Only the earliest inserted match is removed when several events
        share a title.

        Args:
            title: Title of the event to remove.

        Returns:
            True if an event was found and removed, False otherwise.
            A None title matches nothing.
        """
        if title is None:
            return False
        wanted = title.lower()
        for index, event in enumerate(self._events):
            if (event.title or "").lower() == wanted:
                del self._events[index]
                logger.debug("Removed '%s' from schedule '%s'", event.title, self.name)
                return True
        return False

    def get_events(self) -> List[Event]:
        """Return the live list of events in insertion order."""
        return self._events

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self):
        return iter(self._events)

    def to_listing(self) -> str:
        """Render every event as a numbered multi-line listing."""
        lines = [LISTING_HEADER.format(name=self.name), ""]
        if not self._events:
            lines.append(LISTING_EMPTY)
        else:
            for number, event in enumerate(self._events, start=1):
                lines.append(f"{number}. {event.title}")
                lines.append(f"   Location: {event.location}")
                lines.append(f"   Start: {_iso_or_blank(event.start)}")
                lines.append(f"   End: {_iso_or_blank(event.end)}")
                lines.append("")
        lines.append(LISTING_FOOTER)
        return "\n".join(lines) + "\n"

    def to_weekly_view(self, any_date: Union[date, datetime]) -> str:
        """Render the week containing ``any_date`` as text, one block per day."""
        monday, sunday = week_bounds(any_date)
        lines = [
            WEEKLY_VIEW_HEADER.format(week_start=monday.isoformat(), week_end=sunday.isoformat()),
            "",
        ]
        for day, day_events in group_week_by_day(self._events, any_date).items():
            lines.append(f"{format_day_heading(day)}:")
            if not day_events:
                lines.append(f"  {WEEKLY_VIEW_EMPTY_DAY}")
            for event in day_events:
                lines.append(f"  {event.title} at {event.location}")
                lines.append(f"  {event.formatted_range()}")
            lines.append("")
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.to_listing()

    def __repr__(self) -> str:
        return f"Schedule(name={self.name!r}, events={len(self._events)})"


def _iso_or_blank(value: Optional[datetime]) -> str:
    return value.isoformat(sep=" ", timespec="minutes") if value is not None else ""
