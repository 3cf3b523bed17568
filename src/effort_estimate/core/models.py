"""Enums and frozen dataclasses shared by the estimation core."""

from __future__ import annotations

import enum
import numbers
from collections.abc import Iterable
from dataclasses import dataclass

from effort_estimate.core.errors import InvalidInput


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class SizeBucket(enum.Enum):
    """Task size classification by lines of code."""

    XS = "XS"
    S = "S"
    M = "M"
    L = "L"
    XL = "XL"

    @property
    def rank(self) -> int:
        """Position in ascending size order (XS=0 ... XL=4)."""
        return list(SizeBucket).index(self)


class Confidence(enum.Enum):
    """How far an estimate can be trusted, driven by size alone."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"
    UNKNOWN = "Unknown"


class DurationUnit(enum.Enum):
    """Native unit of a bucket's base duration."""

    HOUR = "hour"
    DAY = "day"


class Recommendation(enum.Enum):
    """Decomposition recommendation.

    PROCEED        XS/S/M, estimate is usable as-is
    CONSIDER_SPLIT L, splitting suggested but the estimate stays usable
    MUST_SPLIT     XL, no numeric estimate until the task is decomposed
    """

    PROCEED = "Proceed"
    CONSIDER_SPLIT = "ConsiderSplit"
    MUST_SPLIT = "MustSplit"


class SplitPhase(enum.Enum):
    """Fixed phase vocabulary for decomposing large tasks, in delivery order."""

    FOUNDATION = "Foundation"
    API_LAYER = "API layer"
    PRESENTATION_LAYER = "Presentation layer"
    INTEGRATION = "Integration & wiring"

    @property
    def description(self) -> str:
        return _PHASE_DESCRIPTIONS[self]


_PHASE_DESCRIPTIONS: dict[SplitPhase, str] = {
    SplitPhase.FOUNDATION: "types, interfaces, shared utilities",
    SplitPhase.API_LAYER: "services, data access",
    SplitPhase.PRESENTATION_LAYER: "user-facing output",
    SplitPhase.INTEGRATION: "connect the pieces, end-to-end checks",
}


# ---------------------------------------------------------------------------
# Value objects
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Duration:
    """A duration in one unit. Point values have ``low == high``."""

    low: float
    high: float
    unit: DurationUnit

    def __post_init__(self) -> None:
        if self.low < 0 or self.high < self.low:
            raise ValueError(
                f"Duration requires 0 <= low <= high, got low={self.low}, high={self.high}"
            )

    @classmethod
    def point(cls, value: float, unit: DurationUnit) -> "Duration":
        return cls(low=value, high=value, unit=unit)

    @property
    def is_range(self) -> bool:
        return self.low != self.high

    def scale(self, factor: float) -> "Duration":
        """Multiply both endpoints, keeping the unit (no hour/day conversion)."""
        if factor < 0:
            raise ValueError(f"factor must be >= 0, got {factor}")
        return Duration(low=self.low * factor, high=self.high * factor, unit=self.unit)


@dataclass(frozen=True)
class BucketSpec:
    """One row of the bucket table: half-open LOC interval plus baselines."""

    bucket: SizeBucket
    min_loc: int
    max_loc: int | None  # exclusive; None means unbounded
    base_duration: Duration | None
    confidence: Confidence

    def contains(self, loc: int) -> bool:
        if loc < self.min_loc:
            return False
        return self.max_loc is None or loc < self.max_loc


@dataclass(frozen=True)
class BucketRange:
    """Inclusive range of buckets suggested by a task-type hint."""

    low: SizeBucket
    high: SizeBucket

    def contains(self, bucket: SizeBucket) -> bool:
        return self.low.rank <= bucket.rank <= self.high.rank

    @property
    def label(self) -> str:
        if self.low == self.high:
            return self.low.value
        return f"{self.low.value}-{self.high.value}"


@dataclass(frozen=True)
class Modifier:
    """A named risk factor with an additive weight."""

    id: str
    name: str
    weight: float


@dataclass(frozen=True)
class ModifierCheck:
    """One catalog entry marked applied or not for a given request."""

    modifier: Modifier
    applied: bool


@dataclass(frozen=True)
class MandatorySplit:
    """Terminal calculator outcome for XL tasks.

    Not an error: the caller should decompose the task and submit each
    sub-task to the engine separately.
    """

    bucket: SizeBucket
    reason: str = "No baseline exists at this size; decompose and re-estimate each sub-task."


@dataclass(frozen=True)
class SplitAdvice:
    """Recommendation plus the ordered phase plan, if any."""

    recommendation: Recommendation
    phases: tuple[SplitPhase, ...] | None = None


# ---------------------------------------------------------------------------
# Request / result
# ---------------------------------------------------------------------------


def coerce_loc(value: object) -> int:
    """Validate a LOC estimate and return it as an ``int``.

    Raises:
        InvalidInput: If the value is a bool, non-numeric, non-integral or negative.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidInput(f"loc_estimate must be a whole number, got {value!r}")
    if isinstance(value, numbers.Integral):
        loc = int(value)
    else:
        as_float = float(value)
        if not as_float.is_integer():
            raise InvalidInput(f"loc_estimate must be a whole number, got {value!r}")
        loc = int(as_float)
    if loc < 0:
        raise InvalidInput(f"loc_estimate must be >= 0, got {loc}")
    return loc


@dataclass(frozen=True)
class EstimationRequest:
    """Input to the engine. Modifier ids are deduplicated on construction."""

    loc_estimate: int
    selected_modifiers: frozenset[str] = frozenset()
    task_type_hint: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "loc_estimate", coerce_loc(self.loc_estimate))
        object.__setattr__(
            self, "selected_modifiers", _coerce_modifier_ids(self.selected_modifiers)
        )
        hint = self.task_type_hint
        if hint is not None and not isinstance(hint, str):
            raise InvalidInput(f"task_type_hint must be a string, got {hint!r}")
        if hint is not None and not hint.strip():
            object.__setattr__(self, "task_type_hint", None)


def _coerce_modifier_ids(raw: object) -> frozenset[str]:
    if raw is None:
        return frozenset()
    if isinstance(raw, str):
        raw = (raw,)
    if not isinstance(raw, Iterable):
        raise InvalidInput(f"selected_modifiers must be a collection of ids, got {raw!r}")
    ids: set[str] = set()
    for item in raw:
        if not isinstance(item, str):
            raise InvalidInput(f"modifier id must be a string, got {item!r}")
        ids.add(item)
    return frozenset(ids)


@dataclass(frozen=True)
class EstimationResult:
    """Full, immutable outcome of one estimation request."""

    loc_estimate: int
    bucket: SizeBucket
    base_duration: Duration | None
    multiplier: float
    final_duration: Duration | None
    confidence: Confidence
    applied_modifiers: tuple[Modifier, ...]
    modifier_checklist: tuple[ModifierCheck, ...]
    recommendation: Recommendation
    split_phases: tuple[SplitPhase, ...] | None = None
    task_type_hint: str | None = None
    task_type_suggestion: BucketRange | None = None
    catalog_version: str = ""

    @property
    def must_split(self) -> bool:
        return self.recommendation is Recommendation.MUST_SPLIT

    @property
    def is_estimate_usable(self) -> bool:
        """True when ``final_duration`` may be used for planning."""
        return self.final_duration is not None and not self.must_split

    @property
    def task_type_agrees(self) -> bool | None:
        """Whether the LOC bucket falls inside the task-type suggestion.

        ``None`` when no hint was given or the hint is not in the table.
        """
        if self.task_type_suggestion is None:
            return None
        return self.task_type_suggestion.contains(self.bucket)
