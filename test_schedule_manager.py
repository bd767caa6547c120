"""Tests for ScheduleManager and user-facing batch messages."""

import unittest

from weekplanner.config.settings import ScheduleConfig
from weekplanner.core.manager import ScheduleManager
from weekplanner.core.schedule import Schedule
from weekplanner.exceptions.errors import EventValidationError, ExportError
from weekplanner.messages import BatchResult, format_batch_result, get_user_friendly_error


class TestScheduleManager(unittest.TestCase):
    """Test named schedule bookkeeping."""

    def setUp(self):
        self.manager = ScheduleManager()

    def test_starts_with_default_schedule(self):
        self.assertEqual(self.manager.schedule_names(), ["Weekly Schedule"])
        self.assertEqual(self.manager.current_schedule.name, "Weekly Schedule")

    def test_default_name_comes_from_config(self):
        manager = ScheduleManager(ScheduleConfig(default_schedule_name="Term"))
        self.assertEqual(manager.current_schedule.name, "Term")

    def test_add_schedule_becomes_current(self):
        work = Schedule("Work")
        self.manager.add_schedule(work)

        self.assertIs(self.manager.current_schedule, work)
        self.assertIs(self.manager.get_schedule("WORK"), work)
        self.assertIsNone(self.manager.get_schedule("Home"))

    def test_none_name_matches_nothing(self):
        self.manager.add_schedule(Schedule(""))

        self.assertIsNone(self.manager.get_schedule(None))
        self.assertFalse(self.manager.remove_schedule(None))
        self.assertEqual(len(self.manager), 2)

    def test_set_current(self):
        self.manager.add_schedule(Schedule("Work"))

        self.assertTrue(self.manager.set_current("weekly schedule"))
        self.assertEqual(self.manager.current_schedule.name, "Weekly Schedule")
        self.assertFalse(self.manager.set_current("Missing"))

    def test_remove_schedule_first_match_only(self):
        first = Schedule("Gym")
        second = Schedule("gym")
        self.manager.add_schedule(first)
        self.manager.add_schedule(second)

        self.assertTrue(self.manager.remove_schedule("GYM"))
        self.assertEqual(self.manager.schedule_names(), ["Weekly Schedule", "gym"])
        self.assertIs(self.manager.get_schedule("gym"), second)
        self.assertFalse(self.manager.remove_schedule("Unknown"))

    def test_removing_current_falls_back(self):
        work = Schedule("Work")
        self.manager.add_schedule(work)

        self.manager.remove_schedule("Work")
        self.assertEqual(self.manager.current_schedule.name, "Weekly Schedule")

        self.manager.remove_schedule("Weekly Schedule")
        self.assertEqual(len(self.manager), 1)
        self.assertEqual(self.manager.current_schedule.name, "Weekly Schedule")
        self.assertEqual(len(self.manager.current_schedule), 0)


class TestMessages(unittest.TestCase):
    """Test batch summaries and error wording."""

    def test_batch_result_from_results(self):
        result = BatchResult.from_results([True, False, True, True])

        self.assertEqual((result.accepted, result.rejected, result.total), (3, 1, 4))
        self.assertFalse(result.all_accepted)

    def test_format_batch_result(self):
        self.assertEqual(
            format_batch_result(BatchResult(3, 1)),
            "3 of 4 occurrences added; 1 overlapped existing events.",
        )
        self.assertEqual(format_batch_result(BatchResult(1, 0)), "All 1 occurrence added.")
        self.assertEqual(
            format_batch_result(BatchResult(0, 2)),
            "None of the 2 occurrences were added; all overlapped existing events.",
        )
        self.assertIn("Check the selected days", format_batch_result(BatchResult(0, 0)))

    def test_user_friendly_errors(self):
        missing = EventValidationError(missing_fields={"title"}, event_title="x")
        self.assertEqual(get_user_friendly_error(missing), "Event data is incomplete: missing title")

        invalid = EventValidationError(event_title="x", reason="bad time")
        self.assertEqual(get_user_friendly_error(invalid), "Event data is invalid: bad time")

        self.assertEqual(get_user_friendly_error(ExportError("disk full")), "Export failed: disk full")
        self.assertEqual(get_user_friendly_error(RuntimeError("boom")), "An error occurred: boom")


if __name__ == "__main__":
    unittest.main()
