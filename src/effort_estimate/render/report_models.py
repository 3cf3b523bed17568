"""Shared report data models and value formatting for renderers."""

from __future__ import annotations

from dataclasses import dataclass

from effort_estimate.core.models import Duration, EstimationResult

MUST_SPLIT_MARKER = "MUST SPLIT"


@dataclass(frozen=True)
class ReportTask:
    """One named estimate in the report."""

    name: str
    result: EstimationResult

    @property
    def final_duration_label(self) -> str:
        if self.result.final_duration is None:
            return MUST_SPLIT_MARKER
        return format_duration(self.result.final_duration)

    @property
    def base_duration_label(self) -> str:
        if self.result.base_duration is None:
            return "undefined"
        return format_duration(self.result.base_duration)


@dataclass(frozen=True)
class EstimationReport:
    """Renderer input bundle for one or more estimates."""

    tasks: tuple[ReportTask, ...]
    title: str = "Effort Estimate Report"
    catalog_version: str = ""
    show_phase_details: bool = True

    @property
    def must_split_tasks(self) -> tuple[str, ...]:
        """Names of tasks that have no usable estimate until decomposed."""
        return tuple(task.name for task in self.tasks if task.result.must_split)


def format_number(value: float) -> str:
    """Two decimals at most, trailing zeros dropped: ``2``, ``0.5``, ``0.65``."""
    return f"{value:.2f}".rstrip("0").rstrip(".")


def format_duration(duration: Duration) -> str:
    """Render ``1 hour``, ``0.5 day``, ``2 days`` or ``2.6-3.9 days``."""
    unit = duration.unit.value
    if duration.is_range:
        return f"{format_number(duration.low)}-{format_number(duration.high)} {unit}s"
    amount = format_number(duration.low)
    plural = "" if round(duration.low, 2) <= 1 else "s"
    return f"{amount} {unit}{plural}"


def format_multiplier(value: float) -> str:
    return f"x{value:.2f}"
