"""Exporters that turn a schedule into static documents."""

from weekplanner.export.base import BaseExporter
from weekplanner.export.html_report import HTMLReportExporter, render_week, report_filename
from weekplanner.export.ics_exporter import ICSExporter

__all__ = [
    "BaseExporter",
    "HTMLReportExporter",
    "ICSExporter",
    "render_week",
    "report_filename",
    "get_exporter",
]


def get_exporter(export_format: str, config=None) -> BaseExporter:
    """Return an exporter for "html" or "ics".

    Raises:
        ValueError: If the format is not supported.
    """
    exporters = {"html": HTMLReportExporter, "ics": ICSExporter}
    try:
        return exporters[export_format.lower()](config)
    except KeyError:
        raise ValueError(
            f"Unsupported export format: '{export_format}'. Expected one of {sorted(exporters)}."
        ) from None
