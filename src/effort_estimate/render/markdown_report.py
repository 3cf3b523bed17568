"""Markdown report renderer."""

from __future__ import annotations

from effort_estimate.core.models import Recommendation
from effort_estimate.render.report_models import (
    EstimationReport,
    ReportTask,
    format_multiplier,
)

_RECOMMENDATION_TEXT: dict[Recommendation, str] = {
    Recommendation.PROCEED: "Proceed",
    Recommendation.CONSIDER_SPLIT: "Consider splitting (estimate above is still usable)",
    Recommendation.MUST_SPLIT: (
        "Must split: decompose into the phases below and estimate each sub-task separately"
    ),
}


def render_markdown_report(report: EstimationReport) -> str:
    """Render an estimation report as GitHub-compatible Markdown."""
    lines: list[str] = [
        f"# {report.title}",
        "",
    ]
    lines.extend(_render_summary_table(report))
    for task in report.tasks:
        lines.extend([""])
        lines.extend(_render_task_section(task, show_phase_details=report.show_phase_details))
    lines.extend([""])
    lines.extend(_render_split_warnings(report))
    if report.catalog_version:
        lines.extend(["", f"_Catalog version {report.catalog_version}_"])
    lines.append("")
    return "\n".join(lines)


def _render_summary_table(report: EstimationReport) -> list[str]:
    lines = [
        "## Summary",
        "",
        "| Task | LOC | Size | Base | Multiplier | Estimate | Confidence | Recommendation |",
        "| --- | --- | --- | --- | --- | --- | --- | --- |",
    ]
    for task in report.tasks:
        result = task.result
        estimate = task.final_duration_label
        if result.must_split:
            estimate = f"**{estimate}**"
        lines.append(
            f"| {_escape_cell(task.name)} | {result.loc_estimate} | {result.bucket.value} | "
            f"{task.base_duration_label} | {format_multiplier(result.multiplier)} | "
            f"{estimate} | {result.confidence.value} | {result.recommendation.value} |"
        )
    return lines


def _render_task_section(task: ReportTask, *, show_phase_details: bool) -> list[str]:
    result = task.result
    lines = [
        f"## {_escape_heading(task.name)}",
        "",
        "| Metric | Value |",
        "| --- | --- |",
        f"| Size | {result.bucket.value} ({result.loc_estimate} LOC) |",
        f"| Base duration | {task.base_duration_label} |",
        f"| Multiplier | {format_multiplier(result.multiplier)} |",
        f"| Estimate | {task.final_duration_label} |",
        f"| Confidence | {result.confidence.value} |",
        "",
        "### Modifiers",
        "",
    ]
    for check in result.modifier_checklist:
        mark = "x" if check.applied else " "
        lines.append(f"- [{mark}] {check.modifier.name} (+{check.modifier.weight:.0%})")

    if result.task_type_hint is not None:
        lines.extend(["", "### Task-Type Cross-Check", ""])
        lines.append(_task_type_line(task))

    lines.extend(["", "### Recommendation", "", _RECOMMENDATION_TEXT[result.recommendation]])
    if result.split_phases:
        lines.append("")
        for index, phase in enumerate(result.split_phases, start=1):
            if show_phase_details:
                lines.append(f"{index}. **{phase.value}**: {phase.description}")
            else:
                lines.append(f"{index}. {phase.value}")
    return lines


def _task_type_line(task: ReportTask) -> str:
    result = task.result
    hint = _escape_cell(result.task_type_hint or "")
    suggestion = result.task_type_suggestion
    if suggestion is None:
        return f"No reference range for task type '{hint}'."
    verdict = "consistent with" if result.task_type_agrees else "outside"
    return (
        f"Task type '{hint}' typically sizes {suggestion.label}; "
        f"LOC-derived size {result.bucket.value} is {verdict} that range."
    )


def _render_split_warnings(report: EstimationReport) -> list[str]:
    lines = ["## Split Warnings", ""]
    names = report.must_split_tasks
    if not names:
        lines.append("No tasks require splitting.")
        return lines
    for name in names:
        lines.append(
            f"- **{_escape_cell(name)}**: no valid estimate until decomposed and re-estimated."
        )
    return lines


def _escape_cell(value: str) -> str:
    normalized = value.replace("\r\n", "\n").replace("\r", "\n").replace("\n", "<br>")
    return normalized.replace("|", "\\|")


def _escape_heading(value: str) -> str:
    return " ".join(value.split())
