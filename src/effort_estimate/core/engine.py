"""Estimation entry point: request in, immutable result out."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from effort_estimate.core.calculator import Adjustment, compute_adjustment
from effort_estimate.core.models import (
    BucketRange,
    Confidence,
    EstimationRequest,
    EstimationResult,
    ModifierCheck,
    SplitAdvice,
)
from effort_estimate.core.modifiers import CATALOG_VERSION, DEFAULT_REGISTRY, ModifierRegistry
from effort_estimate.core.sizing import classify_loc, resolve_confidence
from effort_estimate.core.split import advise_split
from effort_estimate.core.task_types import suggest_bucket_range

logger = logging.getLogger("effort_estimate")


def estimate(
    request: EstimationRequest,
    *,
    registry: ModifierRegistry = DEFAULT_REGISTRY,
) -> EstimationResult:
    """Estimate one task.

    Pure and deterministic: identical requests give identical results. XL
    tasks come back with ``Recommendation.MUST_SPLIT`` and no final duration;
    that is a normal result, not an error.

    Raises:
        InvalidInput: If any selected modifier is not in the catalog.
    """
    bucket = classify_loc(request.loc_estimate)
    adjustment = compute_adjustment(bucket, request.selected_modifiers, registry=registry)
    confidence = resolve_confidence(bucket)
    advice = advise_split(bucket)
    suggestion = suggest_bucket_range(request.task_type_hint)

    result = assemble_result(
        request,
        adjustment,
        confidence,
        advice,
        suggestion,
        registry=registry,
    )
    logger.debug(
        "estimated loc=%d: bucket=%s multiplier=%.2f recommendation=%s",
        result.loc_estimate,
        result.bucket.value,
        result.multiplier,
        result.recommendation.value,
    )
    return result


def estimate_loc(
    loc_estimate: int,
    modifiers: Iterable[str] = (),
    task_type: str | None = None,
) -> EstimationResult:
    """Convenience wrapper building the request from plain values."""
    request = EstimationRequest(
        loc_estimate=loc_estimate,
        selected_modifiers=frozenset(modifiers),
        task_type_hint=task_type,
    )
    return estimate(request)


def assemble_result(
    request: EstimationRequest,
    adjustment: Adjustment,
    confidence: Confidence,
    advice: SplitAdvice,
    suggestion: BucketRange | None = None,
    *,
    registry: ModifierRegistry = DEFAULT_REGISTRY,
) -> EstimationResult:
    """Merge component outputs into one result. No I/O, no state."""
    applied_ids = {modifier.id for modifier in adjustment.applied_modifiers}
    checklist = tuple(
        ModifierCheck(modifier=modifier, applied=modifier.id in applied_ids)
        for modifier in registry.list()
    )
    return EstimationResult(
        loc_estimate=request.loc_estimate,
        bucket=adjustment.bucket,
        base_duration=adjustment.base_duration,
        multiplier=adjustment.multiplier,
        final_duration=adjustment.final_duration,
        confidence=confidence,
        applied_modifiers=adjustment.applied_modifiers,
        modifier_checklist=checklist,
        recommendation=advice.recommendation,
        split_phases=advice.phases,
        task_type_hint=request.task_type_hint,
        task_type_suggestion=suggestion,
        catalog_version=CATALOG_VERSION,
    )
