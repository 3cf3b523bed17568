"""Combine bucket baselines with risk modifiers into an adjusted duration."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from effort_estimate.core.models import (
    Duration,
    MandatorySplit,
    Modifier,
    SizeBucket,
)
from effort_estimate.core.modifiers import DEFAULT_REGISTRY, ModifierRegistry, compute_multiplier
from effort_estimate.core.sizing import bucket_spec

logger = logging.getLogger("effort_estimate")


@dataclass(frozen=True)
class Adjustment:
    """Calculator output for one bucket and modifier set.

    ``outcome`` is the adjusted duration, or a ``MandatorySplit`` signal when
    the bucket has no baseline to adjust.
    """

    bucket: SizeBucket
    base_duration: Duration | None
    multiplier: float
    applied_modifiers: tuple[Modifier, ...]
    outcome: Duration | MandatorySplit

    @property
    def final_duration(self) -> Duration | None:
        if isinstance(self.outcome, MandatorySplit):
            return None
        return self.outcome


def compute_adjustment(
    bucket: SizeBucket,
    modifier_ids: Iterable[str] = (),
    *,
    registry: ModifierRegistry = DEFAULT_REGISTRY,
) -> Adjustment:
    """Apply the selected modifiers to a bucket's base duration.

    Point baselines (XS/S/M) stay points and interval baselines (L) have both
    endpoints scaled. Units are kept as-is. XL has no baseline, so the outcome
    is a ``MandatorySplit`` rather than an invented duration.

    Raises:
        InvalidInput: If any modifier id is unknown.
    """
    applied = registry.resolve(modifier_ids)
    multiplier = compute_multiplier(applied)
    base = bucket_spec(bucket).base_duration

    outcome: Duration | MandatorySplit
    if base is None:
        outcome = MandatorySplit(bucket=bucket)
        logger.debug("bucket %s has no baseline; mandatory split", bucket.value)
    else:
        outcome = base.scale(multiplier)
        logger.debug(
            "bucket %s: base %s x %.2f -> %s", bucket.value, base, multiplier, outcome
        )

    return Adjustment(
        bucket=bucket,
        base_duration=base,
        multiplier=multiplier,
        applied_modifiers=applied,
        outcome=outcome,
    )
