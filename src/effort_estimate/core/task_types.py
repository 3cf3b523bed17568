"""Advisory task-type quick reference.

The table is a cross-check only. It suggests a bucket range for common kinds
of work so a reader can spot a LOC estimate that looks off, but it never
changes the bucket derived from lines of code.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

from effort_estimate.core.models import BucketRange, SizeBucket

_XS, _S, _M, _L, _XL = (
    SizeBucket.XS,
    SizeBucket.S,
    SizeBucket.M,
    SizeBucket.L,
    SizeBucket.XL,
)

TASK_TYPE_TABLE: Mapping[str, BucketRange] = MappingProxyType(
    {
        "bug fix": BucketRange(_XS, _S),
        "config change": BucketRange(_XS, _XS),
        "new utility": BucketRange(_S, _S),
        "simple component": BucketRange(_S, _M),
        "complex component": BucketRange(_M, _L),
        "full-stack feature": BucketRange(_L, _XL),
        "single-file refactor": BucketRange(_S, _M),
        "cross-cutting refactor": BucketRange(_L, _XL),
        "api integration": BucketRange(_M, _L),
    }
)

_SEPARATORS = re.compile(r"[\s_\-]+")
_NORMALIZED_TABLE: Mapping[str, BucketRange] = MappingProxyType(
    {_SEPARATORS.sub(" ", key): value for key, value in TASK_TYPE_TABLE.items()}
)


def normalize_task_type(hint: str) -> str:
    """Lower-case a hint and collapse hyphens, underscores and whitespace."""
    return _SEPARATORS.sub(" ", hint.strip().lower()).strip()


def suggest_bucket_range(hint: str | None) -> BucketRange | None:
    """Return the suggested bucket range for a task-type label, if known."""
    if not hint:
        return None
    return _NORMALIZED_TABLE.get(normalize_task_type(hint))
