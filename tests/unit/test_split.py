"""Tests for core/split.py."""

from __future__ import annotations

import pytest

from effort_estimate.core.models import Recommendation, SizeBucket, SplitPhase
from effort_estimate.core.split import PHASE_PLAN, advise_split


@pytest.mark.parametrize("bucket", [SizeBucket.XS, SizeBucket.S, SizeBucket.M])
def test_small_buckets_proceed_without_phases(bucket: SizeBucket) -> None:
    advice = advise_split(bucket)
    assert advice.recommendation is Recommendation.PROCEED
    assert advice.phases is None


def test_l_considers_split_with_phases() -> None:
    advice = advise_split(SizeBucket.L)
    assert advice.recommendation is Recommendation.CONSIDER_SPLIT
    assert advice.phases == PHASE_PLAN


def test_xl_must_split_with_phases() -> None:
    advice = advise_split(SizeBucket.XL)
    assert advice.recommendation is Recommendation.MUST_SPLIT
    assert advice.phases


def test_phase_plan_order() -> None:
    assert [phase.value for phase in PHASE_PLAN] == [
        "Foundation",
        "API layer",
        "Presentation layer",
        "Integration & wiring",
    ]


def test_every_phase_has_a_description() -> None:
    for phase in SplitPhase:
        assert phase.description
