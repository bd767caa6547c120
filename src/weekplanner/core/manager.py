"""Bookkeeping for several named schedules."""

import logging
from typing import List, Optional

from weekplanner.config.settings import SCHEDULE_CONFIG, ScheduleConfig
from weekplanner.core.schedule import Schedule

logger = logging.getLogger(__name__)


class ScheduleManager:
    """Owns a list of schedules and tracks which one is current."""

    def __init__(self, config: Optional[ScheduleConfig] = None) -> None:
        self._config = config or SCHEDULE_CONFIG
        self._schedules: List[Schedule] = [Schedule(self._config.default_schedule_name)]
        self._current = self._schedules[0]

    @property
    def current_schedule(self) -> Schedule:
        return self._current

    def add_schedule(self, schedule: Schedule) -> None:
        """Register a schedule and make it the current one."""
        self._schedules.append(schedule)
        self._current = schedule

    def get_schedule(self, name: str) -> Optional[Schedule]:
        """Find the first schedule whose name matches, ignoring case."""
        if name is None:
            return None
        wanted = name.lower()
        for schedule in self._schedules:
            if schedule.name.lower() == wanted:
                return schedule
        return None

    def set_current(self, name: str) -> bool:
        """Switch the current schedule by name. Returns False if not found."""
        schedule = self.get_schedule(name)
        if schedule is None:
            return False
        self._current = schedule
        return True

    def remove_schedule(self, name: str) -> bool:
        """Remove the first schedule whose name matches, ignoring case.

        If the current schedule is removed, the first remaining schedule
        becomes current, or a fresh default schedule when none remain.

        Returns:
            True if a schedule was removed.
        """
        schedule = self.get_schedule(name)
        if schedule is None:
            logger.info("There is no schedule named '%s'", name)
            return False

        self._schedules.remove(schedule)
        logger.info("Removed schedule '%s'", schedule.name)

        if schedule is self._current:
            if not self._schedules:
                self._schedules.append(Schedule(self._config.default_schedule_name))
            self._current = self._schedules[0]
        return True

    def schedule_names(self) -> List[str]:
        return [schedule.name for schedule in self._schedules]

    def __len__(self) -> int:
        return len(self._schedules)
