"""Half-open interval arithmetic used for double-booking checks."""

from datetime import datetime
from typing import Optional


def intervals_overlap(
    start: Optional[datetime],
    end: Optional[datetime],
    other_start: Optional[datetime],
    other_end: Optional[datetime],
) -> bool:
    """Return True if [start, end) intersects [other_start, other_end).

    Touching endpoints (``end == other_start``) do not overlap. An interval
    with a missing endpoint never overlaps anything.

    Args:
        start: Start of the first interval.
        end: End of the first interval.
        other_start: Start of the second interval.
        other_end: End of the second interval.

    Returns:
        True if the two intervals share at least one instant.
    """
    if start is None or end is None or other_start is None or other_end is None:
        return False
    return start < other_end and end > other_start
