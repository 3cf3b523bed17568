"""Tests for JSON report rendering."""

from __future__ import annotations

import json

import pytest

from effort_estimate.core.engine import estimate_loc
from effort_estimate.render.json_report import render_json_report, result_payload
from effort_estimate.render.report_models import EstimationReport


def test_render_is_canonical_json(mixed_report: EstimationReport) -> None:
    text = render_json_report(mixed_report)
    assert text.endswith("\n")
    payload = json.loads(text)
    assert text == json.dumps(payload, indent=2, sort_keys=True) + "\n"


def test_top_level_fields(mixed_report: EstimationReport) -> None:
    payload = json.loads(render_json_report(mixed_report))
    assert payload["title"] == "Sprint Sizing"
    assert payload["catalog_version"] == "test"
    assert [task["name"] for task in payload["tasks"]] == ["Fix typo", "Dashboard", "Billing rewrite"]
    assert payload["must_split"] == ["Billing rewrite"]


def test_large_task_payload() -> None:
    payload = result_payload(estimate_loc(300, ["external_dependencies"]))
    assert payload["bucket"] == "L"
    assert payload["multiplier"] == pytest.approx(1.3)
    assert payload["base_duration"] == {"low": 2.0, "high": 3.0, "unit": "day", "label": "2-3 days"}
    assert payload["final_duration"]["low"] == pytest.approx(2.6)
    assert payload["final_duration"]["high"] == pytest.approx(3.9)
    assert payload["final_duration"]["label"] == "2.6-3.9 days"
    assert payload["confidence"] == "Low"
    assert payload["recommendation"] == "ConsiderSplit"
    assert payload["split_phases"] == [
        "Foundation",
        "API layer",
        "Presentation layer",
        "Integration & wiring",
    ]


def test_xl_payload_has_null_durations() -> None:
    payload = result_payload(estimate_loc(450))
    assert payload["base_duration"] is None
    assert payload["final_duration"] is None
    assert payload["recommendation"] == "MustSplit"


def test_proceed_payload_has_null_phases() -> None:
    payload = result_payload(estimate_loc(25))
    assert payload["split_phases"] is None
    assert payload["final_duration"]["label"] == "1 hour"


def test_modifier_checklist_payload() -> None:
    payload = result_payload(estimate_loc(50, ["complex_testing"]))
    assert [(m["id"], m["applied"]) for m in payload["modifiers"]] == [
        ("new_technology", False),
        ("external_dependencies", False),
        ("unclear_requirements", False),
        ("complex_testing", True),
    ]
    assert payload["applied_modifiers"] == ["complex_testing"]


def test_task_type_payload() -> None:
    payload = result_payload(estimate_loc(150, task_type="api integration"))
    assert payload["task_type"] == {"hint": "api integration", "suggested_range": "M-L", "agrees": True}
