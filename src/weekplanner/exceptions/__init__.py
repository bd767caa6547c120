"""Custom exceptions for weekplanner."""

from weekplanner.exceptions.errors import (
    WeekPlannerError,
    EventValidationError,
    RecurrenceError,
    ExportError,
    ConfigurationError,
)

__all__ = [
    "WeekPlannerError",
    "EventValidationError",
    "RecurrenceError",
    "ExportError",
    "ConfigurationError",
]
