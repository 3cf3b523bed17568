"""Estimation pipeline: runs named requests through the engine into a report."""

from __future__ import annotations

import logging
from typing import Sequence

from effort_estimate.core import CATALOG_VERSION, DEFAULT_REGISTRY, EstimationRequest, estimate
from effort_estimate.core.config_models import ReportSettings
from effort_estimate.render import EstimationReport, ReportTask

logger = logging.getLogger("effort_estimate")


def run_estimate_pipeline(
    requests: Sequence[tuple[str, EstimationRequest]],
    settings: ReportSettings,
    title: str | None = None,
) -> EstimationReport:
    """Estimate each named request and bundle the results for rendering.

    Raises:
        InvalidInput: If any request is invalid. Nothing is estimated in that case.
    """
    for _, request in requests:
        DEFAULT_REGISTRY.resolve(request.selected_modifiers)

    tasks: list[ReportTask] = []
    for name, request in requests:
        logger.debug("Estimating task: %s", name)
        result = estimate(request)
        if result.must_split:
            logger.info("%s: %d LOC is XL; split before planning", name, result.loc_estimate)
        tasks.append(ReportTask(name=name, result=result))

    return EstimationReport(
        tasks=tuple(tasks),
        title=title or settings.title,
        catalog_version=CATALOG_VERSION,
        show_phase_details=settings.show_phase_details,
    )
