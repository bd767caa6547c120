"""Command line entry point.

Usage: python -m weekplanner {show,week,export} EVENTS.json [options]
"""

import argparse
import json
import logging
import sys
from datetime import date, datetime
from pathlib import Path
from typing import List, Optional, Tuple

from weekplanner.config.settings import load_settings
from weekplanner.core.forms import load_entries
from weekplanner.core.schedule import Schedule
from weekplanner.exceptions.errors import WeekPlannerError
from weekplanner.export import get_exporter
from weekplanner.messages import BatchResult, format_batch_result, get_user_friendly_error

logger = logging.getLogger(__name__)


def parse_date(date_str: str) -> date:
    """Parse date string in YYYY-MM-DD format."""
    try:
        return datetime.strptime(date_str, "%Y-%m-%d").date()
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Invalid date format: '{date_str}'. Expected YYYY-MM-DD."
        )


def load_schedule(path: Path, name: str) -> Tuple[Schedule, BatchResult]:
    """Read a JSON list of entries and offer each event to a new schedule.

    Overlapping events are rejected and counted, not treated as errors.

    Raises:
        WeekPlannerError: If an entry is invalid.
        ValueError: If the file is not a JSON list.
        OSError: If the file can't be read.
    """
    with open(path, encoding="utf-8") as f:
        entries = json.load(f)
    if not isinstance(entries, list):
        raise ValueError(f"{path} must contain a JSON list of events")

    schedule = Schedule(name)
    results: List[bool] = []
    for events in load_entries(entries):
        results.extend(schedule.add_events(events))
    return schedule, BatchResult.from_results(results)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="weekplanner",
        description="Check a list of events for double-booking and produce weekly views.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m weekplanner show events.json
  python -m weekplanner week events.json --date 2026-01-07
  python -m weekplanner export events.json --format ics --output my_week.ics
        """,
    )
    parser.add_argument("--env-file", default=None, help="Read WEEKPLANNER_* settings from this .env file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_common(sub: argparse.ArgumentParser) -> None:
        sub.add_argument("events", type=Path, help="JSON file with a list of events")
        sub.add_argument("--schedule", default=None, help="Schedule name (default from settings)")

    show = subparsers.add_parser("show", help="Print every accepted event")
    add_common(show)

    week = subparsers.add_parser("week", help="Print one week grouped by day")
    add_common(week)
    week.add_argument(
        "--date", type=parse_date, default=None,
        help="Any date in the week to show (format: YYYY-MM-DD, default: today)",
    )

    export = subparsers.add_parser("export", help="Write weekly HTML reports or an .ics file")
    add_common(export)
    export.add_argument("--format", choices=["html", "ics"], default=None, help="Output format")
    export.add_argument(
        "-o", "--output", default=None,
        help="Output directory (html) or file (ics); default from settings",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    args = build_parser().parse_args(argv)

    try:
        schedule_config, export_config = load_settings(args.env_file)
    except WeekPlannerError as e:
        print(f"Error: {get_user_friendly_error(e)}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else schedule_config.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        schedule, batch = load_schedule(
            args.events, args.schedule or schedule_config.default_schedule_name
        )
        if not batch.all_accepted:
            print(format_batch_result(batch, noun="event"), file=sys.stderr)

        if args.command == "show":
            print(schedule.to_listing(), end="")
        elif args.command == "week":
            print(schedule.to_weekly_view(args.date or date.today()), end="")
        else:
            exporter = get_exporter(args.format or export_config.default_format, export_config)
            exporter.export(schedule)
            written = exporter.save(args.output)
            paths = written if isinstance(written, list) else [written]
            if not paths:
                print("Warning: No events to export.")
            for path in paths:
                print(f"Saved: {path}")

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        return 130
    except (WeekPlannerError, OSError) as e:
        print(f"Error: {get_user_friendly_error(e)}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
