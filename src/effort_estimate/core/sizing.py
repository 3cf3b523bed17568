"""Size classification by lines of code, and size-driven confidence."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping

from effort_estimate.core.models import (
    BucketSpec,
    Confidence,
    Duration,
    DurationUnit,
    SizeBucket,
    coerce_loc,
)

logger = logging.getLogger("effort_estimate")

# Ascending, half-open [min_loc, max_loc) intervals; XL is unbounded.
BUCKET_TABLE: tuple[BucketSpec, ...] = (
    BucketSpec(
        bucket=SizeBucket.XS,
        min_loc=0,
        max_loc=30,
        base_duration=Duration.point(1.0, DurationUnit.HOUR),
        confidence=Confidence.HIGH,
    ),
    BucketSpec(
        bucket=SizeBucket.S,
        min_loc=30,
        max_loc=100,
        base_duration=Duration.point(0.5, DurationUnit.DAY),
        confidence=Confidence.HIGH,
    ),
    BucketSpec(
        bucket=SizeBucket.M,
        min_loc=100,
        max_loc=200,
        base_duration=Duration.point(1.0, DurationUnit.DAY),
        confidence=Confidence.MEDIUM,
    ),
    BucketSpec(
        bucket=SizeBucket.L,
        min_loc=200,
        max_loc=400,
        base_duration=Duration(low=2.0, high=3.0, unit=DurationUnit.DAY),
        confidence=Confidence.LOW,
    ),
    BucketSpec(
        bucket=SizeBucket.XL,
        min_loc=400,
        max_loc=None,
        base_duration=None,
        confidence=Confidence.UNKNOWN,
    ),
)

_SPECS_BY_BUCKET: Mapping[SizeBucket, BucketSpec] = MappingProxyType(
    {spec.bucket: spec for spec in BUCKET_TABLE}
)


def bucket_spec(bucket: SizeBucket) -> BucketSpec:
    """Return the table row for a bucket."""
    return _SPECS_BY_BUCKET[bucket]


def classify_loc(loc_estimate: object) -> SizeBucket:
    """Map a LOC estimate to its size bucket.

    Raises:
        InvalidInput: If the estimate is negative or not a whole number.
    """
    loc = coerce_loc(loc_estimate)
    for spec in BUCKET_TABLE:
        if spec.contains(loc):
            logger.debug("loc=%d -> bucket %s", loc, spec.bucket.value)
            return spec.bucket
    # The table ends with an unbounded interval starting at a finite LOC.
    raise AssertionError(f"bucket table does not cover loc={loc}")  # pragma: no cover


def resolve_confidence(bucket: SizeBucket) -> Confidence:
    """Return the baseline confidence for a bucket. Modifiers never change it."""
    return _SPECS_BY_BUCKET[bucket].confidence
