"""Exception classes for weekplanner."""

from typing import Iterable, Optional


class WeekPlannerError(Exception):
    """Base exception for all weekplanner errors."""


class EventValidationError(WeekPlannerError):
    """Raised when event input is incomplete or cannot be parsed."""

    def __init__(
        self,
        missing_fields: Optional[Iterable[str]] = None,
        event_title: Optional[str] = None,
        reason: Optional[str] = None,
    ):
        self.missing_fields = sorted(missing_fields or [])
        self.event_title = event_title or "Unknown"
        self.reason = reason

        if self.missing_fields:
            message = (
                f"Event '{self.event_title}' is missing required fields: "
                f"{', '.join(self.missing_fields)}"
            )
        else:
            message = f"Event '{self.event_title}' is invalid"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class RecurrenceError(WeekPlannerError):
    """Raised when a recurrence description cannot be turned into a rule."""


class ExportError(WeekPlannerError):
    """Raised when a report cannot be produced or written."""


class ConfigurationError(WeekPlannerError):
    """Raised when a configuration value is invalid."""

    def __init__(self, key: str, value: object, reason: str):
        self.key = key
        self.value = value
        super().__init__(f"Invalid value for {key}: {value!r} ({reason})")
