"""Risk modifier catalog and multiplier composition."""

from __future__ import annotations

import math
from collections.abc import Iterable

from effort_estimate.core.errors import InvalidInput
from effort_estimate.core.models import Modifier

# Bump when the bucket table or modifier catalog changes.
CATALOG_VERSION = "2024.1"

# Registration order is also report rendering order.
_CATALOG: tuple[Modifier, ...] = (
    Modifier(id="new_technology", name="New technology", weight=0.5),
    Modifier(id="external_dependencies", name="External dependencies", weight=0.3),
    Modifier(id="unclear_requirements", name="Unclear requirements", weight=0.5),
    Modifier(id="complex_testing", name="Complex testing", weight=0.3),
)


def normalize_modifier_id(raw: str) -> str:
    """Normalize CLI-style ids: ``New-Technology`` -> ``new_technology``."""
    return raw.strip().lower().replace("-", "_")


class ModifierRegistry:
    """Closed, read-only catalog of risk modifiers."""

    def __init__(self, modifiers: Iterable[Modifier]) -> None:
        ordered = tuple(modifiers)
        by_id: dict[str, Modifier] = {}
        for modifier in ordered:
            if modifier.weight < 0:
                raise ValueError(f"modifier {modifier.id!r} has negative weight {modifier.weight}")
            if modifier.id in by_id:
                raise ValueError(f"duplicate modifier id {modifier.id!r}")
            by_id[modifier.id] = modifier
        self._ordered = ordered
        self._by_id = by_id

    def __len__(self) -> int:
        return len(self._ordered)

    def __contains__(self, modifier_id: object) -> bool:
        return isinstance(modifier_id, str) and normalize_modifier_id(modifier_id) in self._by_id

    def lookup(self, modifier_id: str) -> Modifier:
        """Return the modifier for an id.

        Raises:
            InvalidInput: If the id is not in the catalog.
        """
        try:
            return self._by_id[normalize_modifier_id(modifier_id)]
        except KeyError:
            known = ", ".join(m.id for m in self._ordered)
            raise InvalidInput(
                f"Unknown modifier {modifier_id!r}. Known modifiers: {known}"
            ) from None

    def list(self) -> tuple[Modifier, ...]:
        """Return the full catalog in registration order."""
        return self._ordered

    def resolve(self, modifier_ids: Iterable[str]) -> tuple[Modifier, ...]:
        """Validate ids and return the matching modifiers in catalog order.

        Duplicates collapse; every id is checked before anything is returned.
        """
        selected = {self.lookup(modifier_id).id for modifier_id in modifier_ids}
        return tuple(m for m in self._ordered if m.id in selected)


DEFAULT_REGISTRY = ModifierRegistry(_CATALOG)


def compute_multiplier(modifiers: Iterable[Modifier]) -> float:
    """Return ``1 + sum(weights)``.

    ``math.fsum`` is correctly rounded, so the result does not depend on the
    order modifiers are given in.
    """
    return 1.0 + math.fsum(modifier.weight for modifier in modifiers)
