"""User-facing messages for errors and batch insert results."""

from dataclasses import dataclass
from typing import Sequence

from weekplanner.exceptions.errors import (
    ConfigurationError,
    EventValidationError,
    ExportError,
    RecurrenceError,
)


@dataclass(frozen=True)
class BatchResult:
    """Outcome of offering several events to a schedule."""

    accepted: int
    rejected: int

    @property
    def total(self) -> int:
        return self.accepted + self.rejected

    @property
    def all_accepted(self) -> bool:
        return self.rejected == 0

    @classmethod
    def from_results(cls, results: Sequence[bool]) -> "BatchResult":
        accepted = sum(1 for result in results if result)
        return cls(accepted=accepted, rejected=len(results) - accepted)


def format_batch_result(result: BatchResult, noun: str = "occurrence") -> str:
    """Describe a batch insert, e.g. "3 of 4 occurrences added; 1 overlapped existing events."

    Args:
        result: The batch outcome.
        noun: What was added, singular.

    Returns:
        A one-line summary.
    """
    if result.total == 0:
        return f"No {noun}s to add. Check the selected days and date range."

    plural = noun if result.total == 1 else f"{noun}s"
    if result.all_accepted:
        return f"All {result.total} {plural} added."
    if result.accepted == 0:
        return f"None of the {result.total} {plural} were added; all overlapped existing events."
    return (
        f"{result.accepted} of {result.total} {plural} added; "
        f"{result.rejected} overlapped existing events."
    )


def get_user_friendly_error(error: Exception) -> str:
    """Convert an exception to a user-friendly error message.

    Args:
        error: The exception to convert.

    Returns:
        A user-friendly error message string.
    """
    if isinstance(error, EventValidationError):
        if error.missing_fields:
            return f"Event data is incomplete: missing {', '.join(error.missing_fields)}"
        return f"Event data is invalid: {error.reason or error}"

    if isinstance(error, RecurrenceError):
        return f"Recurring event is invalid: {error}"

    if isinstance(error, ExportError):
        return f"Export failed: {error}"

    if isinstance(error, ConfigurationError):
        return f"Configuration problem: {error}"

    if isinstance(error, FileNotFoundError):
        return f"File not found: {error.filename}"

    return f"An error occurred: {error}"
