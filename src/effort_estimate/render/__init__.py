"""Output rendering modules."""

from effort_estimate.render.json_report import render_json_report
from effort_estimate.render.markdown_report import render_markdown_report
from effort_estimate.render.report_models import (
    EstimationReport,
    ReportTask,
    format_duration,
)

__all__ = [
    "EstimationReport",
    "ReportTask",
    "format_duration",
    "render_json_report",
    "render_markdown_report",
]
