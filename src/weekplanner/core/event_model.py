"""Event data model for scheduled events."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Dict, Iterable, Optional

from weekplanner.core.intervals import intervals_overlap
from weekplanner.utils.formatting import format_display_date, format_display_time


@dataclass(eq=False)
class Event:
    """A titled time interval at a location.

    Fields are plain attributes and may be reassigned. Changing ``start`` or
    ``end`` of an event that is already stored in a Schedule does not re-run
    the overlap check; remove and re-add the event to validate it again.

    Equality is identity: two separately created events with the same
    fields are distinct entries in a schedule.
    """

    title: str = ""
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    location: str = ""

    @property
    def start_date(self) -> Optional[date]:
        """Calendar date of the start, or None when unset."""
        return self.start.date() if self.start is not None else None

    @property
    def is_complete(self) -> bool:
        """True when both endpoints are set."""
        return self.start is not None and self.end is not None

    def copy(self) -> "Event":
        """Return an independent event with the same fields."""
        return Event(self.title, self.start, self.end, self.location)

    def overlaps(self, other: "Event") -> bool:
        """Check this event against one other event (half-open intervals)."""
        return intervals_overlap(self.start, self.end, other.start, other.end)

    def is_overlapping(self, events: Optional[Iterable["Event"]]) -> bool:
        """Check if this event overlaps any of the given events.

        Events with a missing start or end are skipped, and an event with a
        missing endpoint never overlaps anything.

        Args:
            events: Events to check against.

        Returns:
            True if there is an overlap, False otherwise.
        """
        if events is None or not self.is_complete:
            return False
        return any(other is not None and self.overlaps(other) for other in events)

    def formatted_start_date(self) -> str:
        return format_display_date(self.start)

    def formatted_end_date(self) -> str:
        return format_display_date(self.end)

    def formatted_start_time(self) -> str:
        return format_display_time(self.start)

    def formatted_end_time(self) -> str:
        return format_display_time(self.end)

    def formatted_date(self) -> str:
        """Start date as "Jan 5, 2026", or empty string when unset."""
        return self.formatted_start_date()

    def formatted_time(self) -> str:
        """Time span as "9:00 AM - 9:30 AM", or empty string when unset."""
        if not self.is_complete:
            return ""
        return f"{self.formatted_start_time()} - {self.formatted_end_time()}"

    def formatted_range(self) -> str:
        """Date and time span as "Jan 5, 2026 9:00 AM - 9:30 AM"."""
        if not self.is_complete:
            return ""
        return f"{self.formatted_date()} {self.formatted_time()}"

    def to_dict(self) -> Dict:
        """Convert to a dictionary with ISO formatted datetimes.

        Returns:
            Dictionary representation of the event.
        """
        return {
            "title": self.title,
            "location": self.location,
            "start": self.start.isoformat() if self.start is not None else None,
            "end": self.end.isoformat() if self.end is not None else None,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "Event":
        """Create an Event from the output of ``to_dict``."""
        start = data.get("start")
        end = data.get("end")
        return cls(
            title=data.get("title", ""),
            start=datetime.fromisoformat(start) if start else None,
            end=datetime.fromisoformat(end) if end else None,
            location=data.get("location", ""),
        )

    def __str__(self) -> str:
        return f"{self.title} at {self.location}\n{self.formatted_range()}"
