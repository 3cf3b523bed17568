"""JSON report renderer."""

from __future__ import annotations

import json
from typing import Any

from effort_estimate.core.models import Duration, EstimationResult
from effort_estimate.render.report_models import EstimationReport, format_duration


def render_json_report(report: EstimationReport) -> str:
    """Render an estimation report as canonical JSON."""
    payload = _build_payload(report)
    return json.dumps(payload, indent=2, sort_keys=True) + "\n"


def _build_payload(report: EstimationReport) -> dict[str, Any]:
    return {
        "title": report.title,
        "catalog_version": report.catalog_version,
        "tasks": [
            {"name": task.name, **result_payload(task.result)} for task in report.tasks
        ],
        "must_split": list(report.must_split_tasks),
    }


def result_payload(result: EstimationResult) -> dict[str, Any]:
    """Serialize one result. ``final_duration`` is null for must-split tasks."""
    suggestion = result.task_type_suggestion
    return {
        "loc_estimate": result.loc_estimate,
        "bucket": result.bucket.value,
        "base_duration": _duration_payload(result.base_duration),
        "multiplier": round(result.multiplier, 4),
        "final_duration": _duration_payload(result.final_duration),
        "confidence": result.confidence.value,
        "modifiers": [
            {
                "id": check.modifier.id,
                "name": check.modifier.name,
                "weight": check.modifier.weight,
                "applied": check.applied,
            }
            for check in result.modifier_checklist
        ],
        "applied_modifiers": [modifier.id for modifier in result.applied_modifiers],
        "recommendation": result.recommendation.value,
        "split_phases": (
            [phase.value for phase in result.split_phases]
            if result.split_phases is not None
            else None
        ),
        "task_type": {
            "hint": result.task_type_hint,
            "suggested_range": suggestion.label if suggestion is not None else None,
            "agrees": result.task_type_agrees,
        },
    }


def _duration_payload(duration: Duration | None) -> dict[str, Any] | None:
    if duration is None:
        return None
    return {
        "low": round(duration.low, 4),
        "high": round(duration.high, 4),
        "unit": duration.unit.value,
        "label": format_duration(duration),
    }
