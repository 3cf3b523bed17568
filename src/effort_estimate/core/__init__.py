"""Core estimation models and algorithms."""

from effort_estimate.core.calculator import Adjustment, compute_adjustment
from effort_estimate.core.config_models import ReportSettings, TaskFile, TaskSpec
from effort_estimate.core.engine import assemble_result, estimate, estimate_loc
from effort_estimate.core.errors import InvalidInput
from effort_estimate.core.models import (
    BucketRange,
    BucketSpec,
    Confidence,
    Duration,
    DurationUnit,
    EstimationRequest,
    EstimationResult,
    MandatorySplit,
    Modifier,
    ModifierCheck,
    Recommendation,
    SizeBucket,
    SplitAdvice,
    SplitPhase,
)
from effort_estimate.core.modifiers import (
    CATALOG_VERSION,
    DEFAULT_REGISTRY,
    ModifierRegistry,
    compute_multiplier,
)
from effort_estimate.core.sizing import BUCKET_TABLE, bucket_spec, classify_loc, resolve_confidence
from effort_estimate.core.split import PHASE_PLAN, advise_split
from effort_estimate.core.task_types import TASK_TYPE_TABLE, suggest_bucket_range

__all__ = [
    "Adjustment",
    "BUCKET_TABLE",
    "BucketRange",
    "BucketSpec",
    "CATALOG_VERSION",
    "Confidence",
    "DEFAULT_REGISTRY",
    "Duration",
    "DurationUnit",
    "EstimationRequest",
    "EstimationResult",
    "InvalidInput",
    "MandatorySplit",
    "Modifier",
    "ModifierCheck",
    "ModifierRegistry",
    "PHASE_PLAN",
    "Recommendation",
    "ReportSettings",
    "SizeBucket",
    "SplitAdvice",
    "SplitPhase",
    "TASK_TYPE_TABLE",
    "TaskFile",
    "TaskSpec",
    "advise_split",
    "assemble_result",
    "bucket_spec",
    "classify_loc",
    "compute_adjustment",
    "compute_multiplier",
    "estimate",
    "estimate_loc",
    "resolve_confidence",
    "suggest_bucket_range",
]
