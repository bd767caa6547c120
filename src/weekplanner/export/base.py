"""Abstract base class for schedule exporters."""

from abc import ABC, abstractmethod
from typing import Any

from weekplanner.core.schedule import Schedule


class BaseExporter(ABC):
    """Interface for turning a Schedule into a static document.

    Extend this class to implement exporters for other output formats.
    ``export`` builds the document in memory and ``save`` writes what the
    last ``export`` produced.
    """

    @abstractmethod
    def export(self, schedule: Schedule) -> Any:
        """Build the document(s) for a schedule.

        Args:
            schedule: Schedule to export.

        Returns:
            The exported data in the target format.
        """

    @abstractmethod
    def save(self, output: Any = None) -> Any:
        """Write the exported data.

        Args:
            output: Target path; exporters fall back to their configuration.

        Raises:
            ExportError: If ``export`` has not been called or writing fails.
        """
