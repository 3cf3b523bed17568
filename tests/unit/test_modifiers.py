"""Dedicated tests for core/modifiers.py covering the catalog and composition."""

from __future__ import annotations

import itertools

import pytest

from effort_estimate.core.errors import InvalidInput
from effort_estimate.core.models import Modifier
from effort_estimate.core.modifiers import (
    DEFAULT_REGISTRY,
    ModifierRegistry,
    compute_multiplier,
    normalize_modifier_id,
)


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


class TestCatalog:
    def test_catalog_order_is_registration_order(self) -> None:
        assert [m.id for m in DEFAULT_REGISTRY.list()] == [
            "new_technology",
            "external_dependencies",
            "unclear_requirements",
            "complex_testing",
        ]

    def test_catalog_weights(self) -> None:
        weights = {m.id: m.weight for m in DEFAULT_REGISTRY.list()}
        assert weights == {
            "new_technology": 0.5,
            "external_dependencies": 0.3,
            "unclear_requirements": 0.5,
            "complex_testing": 0.3,
        }

    def test_catalog_is_a_tuple(self) -> None:
        assert isinstance(DEFAULT_REGISTRY.list(), tuple)
        assert len(DEFAULT_REGISTRY) == 4

    def test_modifiers_are_frozen(self) -> None:
        modifier = DEFAULT_REGISTRY.lookup("new_technology")
        with pytest.raises(AttributeError):
            modifier.weight = 2.0  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------


class TestLookup:
    def test_lookup_known_id(self) -> None:
        assert DEFAULT_REGISTRY.lookup("complex_testing").weight == pytest.approx(0.3)

    def test_lookup_unknown_id_raises(self) -> None:
        with pytest.raises(InvalidInput, match="vendor_lock_in"):
            DEFAULT_REGISTRY.lookup("vendor_lock_in")

    def test_lookup_accepts_cli_style_id(self) -> None:
        assert DEFAULT_REGISTRY.lookup("New-Technology").id == "new_technology"

    def test_contains(self) -> None:
        assert "external_dependencies" in DEFAULT_REGISTRY
        assert "nope" not in DEFAULT_REGISTRY
        assert 42 not in DEFAULT_REGISTRY

    def test_normalize_modifier_id(self) -> None:
        assert normalize_modifier_id("  Unclear-Requirements ") == "unclear_requirements"


class TestResolve:
    def test_resolve_returns_catalog_order(self) -> None:
        resolved = DEFAULT_REGISTRY.resolve(["complex_testing", "new_technology"])
        assert [m.id for m in resolved] == ["new_technology", "complex_testing"]

    def test_resolve_deduplicates(self) -> None:
        resolved = DEFAULT_REGISTRY.resolve(["new_technology", "new-technology"])
        assert len(resolved) == 1

    def test_resolve_rejects_whole_set_on_one_bad_id(self) -> None:
        with pytest.raises(InvalidInput):
            DEFAULT_REGISTRY.resolve(["new_technology", "bogus"])


class TestRegistryConstruction:
    def test_negative_weight_rejected(self) -> None:
        with pytest.raises(ValueError, match="negative weight"):
            ModifierRegistry([Modifier(id="x", name="X", weight=-0.1)])

    def test_duplicate_id_rejected(self) -> None:
        with pytest.raises(ValueError, match="duplicate"):
            ModifierRegistry(
                [Modifier(id="x", name="X", weight=0.1), Modifier(id="x", name="Y", weight=0.2)]
            )

    def test_accepts_a_generator(self) -> None:
        registry = ModifierRegistry(m for m in DEFAULT_REGISTRY.list())
        assert registry.list() == DEFAULT_REGISTRY.list()
        assert len(registry) == len(DEFAULT_REGISTRY)
        assert registry.lookup("complex_testing").weight == pytest.approx(0.3)


# ---------------------------------------------------------------------------
# Multiplier composition
# ---------------------------------------------------------------------------


class TestMultiplier:
    def test_no_modifiers_is_one(self) -> None:
        assert compute_multiplier(()) == 1.0

    def test_two_half_weights_double(self) -> None:
        mods = DEFAULT_REGISTRY.resolve(["new_technology", "unclear_requirements"])
        assert compute_multiplier(mods) == pytest.approx(2.0)

    def test_all_modifiers(self) -> None:
        assert compute_multiplier(DEFAULT_REGISTRY.list()) == pytest.approx(2.6)

    def test_order_independent(self) -> None:
        catalog = DEFAULT_REGISTRY.list()
        results = {compute_multiplier(perm) for perm in itertools.permutations(catalog)}
        assert len(results) == 1

    def test_never_below_one(self) -> None:
        for size in range(len(DEFAULT_REGISTRY) + 1):
            for combo in itertools.combinations(DEFAULT_REGISTRY.list(), size):
                assert compute_multiplier(combo) >= 1.0
