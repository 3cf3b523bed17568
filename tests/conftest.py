"""Shared fixtures for effort_estimate test suite."""

from __future__ import annotations

import logging

import pytest

from effort_estimate.core.engine import estimate_loc
from effort_estimate.core.models import EstimationRequest, EstimationResult
from effort_estimate.render.report_models import EstimationReport, ReportTask


@pytest.fixture
def medium_request() -> EstimationRequest:
    """A 150 LOC request with two +50% modifiers."""
    return EstimationRequest(
        loc_estimate=150,
        selected_modifiers=frozenset({"new_technology", "unclear_requirements"}),
    )


@pytest.fixture
def large_result() -> EstimationResult:
    """A 300 LOC result with one +30% modifier (ConsiderSplit)."""
    return estimate_loc(300, ["external_dependencies"])


@pytest.fixture
def xl_result() -> EstimationResult:
    """A 450 LOC result (MustSplit)."""
    return estimate_loc(450, ["complex_testing"])


@pytest.fixture
def mixed_report(large_result: EstimationResult, xl_result: EstimationResult) -> EstimationReport:
    """A report with XS, L and XL tasks."""
    return EstimationReport(
        title="Sprint Sizing",
        catalog_version="test",
        tasks=(
            ReportTask(name="Fix typo", result=estimate_loc(10, task_type="bug fix")),
            ReportTask(name="Dashboard", result=large_result),
            ReportTask(name="Billing rewrite", result=xl_result),
        ),
    )


@pytest.fixture
def reset_root_logging():
    """Undo ``logging.basicConfig(force=True)`` done by ``--verbose``."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
