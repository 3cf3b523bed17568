"""Decomposition policy for large tasks."""

from __future__ import annotations

from effort_estimate.core.models import Recommendation, SizeBucket, SplitAdvice, SplitPhase

PHASE_PLAN: tuple[SplitPhase, ...] = (
    SplitPhase.FOUNDATION,
    SplitPhase.API_LAYER,
    SplitPhase.PRESENTATION_LAYER,
    SplitPhase.INTEGRATION,
)

_RECOMMENDATIONS: dict[SizeBucket, Recommendation] = {
    SizeBucket.XS: Recommendation.PROCEED,
    SizeBucket.S: Recommendation.PROCEED,
    SizeBucket.M: Recommendation.PROCEED,
    SizeBucket.L: Recommendation.CONSIDER_SPLIT,
    SizeBucket.XL: Recommendation.MUST_SPLIT,
}


def advise_split(bucket: SizeBucket) -> SplitAdvice:
    """Return the recommendation for a bucket, with phases unless Proceed.

    Modifiers play no part: only size decides whether to split.
    """
    recommendation = _RECOMMENDATIONS[bucket]
    if recommendation is Recommendation.PROCEED:
        return SplitAdvice(recommendation=recommendation)
    return SplitAdvice(recommendation=recommendation, phases=PHASE_PLAN)
