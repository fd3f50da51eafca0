"""Tests for the KB field catalog and vertical override resolution."""

import pytest

from app.core.kb_scoring.fields import (
    SCOREABLE_FIELDS,
    apply_vertical_override,
    get_category_total_weight,
    get_field_definition,
    get_fields_by_category,
    get_fields_for_vertical,
)
from app.core.kb_scoring.types import CATEGORY_WEIGHTS


class TestCatalog:
    """Tests for the static field catalog."""

    def test_category_weights_sum_to_100(self) -> None:
        assert sum(CATEGORY_WEIGHTS.values()) == 100

    def test_category_weights_exact_values(self) -> None:
        assert CATEGORY_WEIGHTS == {
            "core_data": 30,
            "personality": 25,
            "policies": 20,
            "knowledge": 15,
            "advanced": 10,
        }

    def test_keys_are_unique(self) -> None:
        keys = [f.key for f in SCOREABLE_FIELDS]
        assert len(keys) == len(set(keys))

    def test_weights_are_positive(self) -> None:
        assert all(f.weight > 0 for f in SCOREABLE_FIELDS)

    def test_every_category_has_fields(self) -> None:
        categories = {f.category for f in SCOREABLE_FIELDS}
        assert categories == set(CATEGORY_WEIGHTS)

    def test_catalog_is_immutable(self) -> None:
        """Catalog entries are frozen models."""
        with pytest.raises(Exception):
            SCOREABLE_FIELDS[0].weight = 99  # type: ignore[misc]


class TestGetFieldDefinition:
    """Tests for get_field_definition."""

    def test_unknown_key_returns_none(self) -> None:
        assert get_field_definition("does_not_exist", "dental") is None

    def test_base_definition_without_override(self) -> None:
        field = get_field_definition("services_configured", "general")
        assert field is not None
        assert field.min_count == 3
        assert field.label == "Configured services"

    def test_dental_override_applied(self) -> None:
        field = get_field_definition("services_configured", "dental")
        assert field is not None
        assert field.min_count == 5
        assert field.label == "Dental treatments"

    def test_override_changes_only_overridden_attributes(self) -> None:
        base = get_field_definition("staff_configured", None)
        overridden = get_field_definition("staff_configured", "dental")
        assert base is not None and overridden is not None

        assert overridden.priority == "essential"
        assert overridden.label == "Dentists and specialists"

        base_dump = base.model_dump(exclude={"priority", "label"})
        overridden_dump = overridden.model_dump(exclude={"priority", "label"})
        assert base_dump == overridden_dump

    def test_base_catalog_not_mutated(self) -> None:
        get_field_definition("services_configured", "dental")
        base = next(f for f in SCOREABLE_FIELDS if f.key == "services_configured")
        assert base.min_count == 3
        assert base.label == "Configured services"

    def test_repeated_calls_value_equal(self) -> None:
        first = get_field_definition("cancellation_policy", "clinic")
        second = get_field_definition("cancellation_policy", "clinic")
        assert first == second


class TestApplyVerticalOverride:
    """Tests for the shallow override merge."""

    def test_unknown_vertical_returns_base(self) -> None:
        field = SCOREABLE_FIELDS[0]
        assert apply_vertical_override(field, "spaceship_dealer") is field

    def test_none_vertical_returns_base(self) -> None:
        field = SCOREABLE_FIELDS[0]
        assert apply_vertical_override(field, None) is field

    def test_override_is_shallow_replacement(self) -> None:
        """An overridden attribute replaces the base value wholesale."""
        field = next(f for f in SCOREABLE_FIELDS if f.key == "services_configured")
        patched = field.model_copy(
            update={"vertical_overrides": {"x": {"must_contain_keywords": ("menu",)}}}
        )
        resolved = apply_vertical_override(patched, "x")
        assert resolved.must_contain_keywords == ("menu",)

    def test_idempotent(self) -> None:
        field = next(f for f in SCOREABLE_FIELDS if f.key == "warranty_policy")
        once = apply_vertical_override(field, "dental")
        twice = apply_vertical_override(once, "dental")
        assert once == twice


class TestGetFieldsForVertical:
    """Tests for get_fields_for_vertical."""

    def test_vertical_without_overrides_equals_base(self) -> None:
        assert get_fields_for_vertical("veterinary") == list(SCOREABLE_FIELDS)

    def test_preserves_catalog_order(self) -> None:
        keys = [f.key for f in get_fields_for_vertical("dental")]
        assert keys == [f.key for f in SCOREABLE_FIELDS]

    def test_overrides_applied_per_field(self) -> None:
        fields = {f.key: f for f in get_fields_for_vertical("restaurant")}
        assert fields["services_configured"].label == "Menu items"
        # No restaurant override registered
        assert fields["staff_configured"].priority == "recommended"

    def test_fields_by_category(self) -> None:
        fields = get_fields_by_category("personality", "general")
        assert [f.key for f in fields] == [
            "identity",
            "greeting",
            "farewell",
            "communication_style",
        ]


class TestCategoryTotalWeight:
    """Tests for get_category_total_weight."""

    @pytest.mark.parametrize(
        "category,expected",
        [
            ("core_data", 30),
            ("personality", 25),
            ("policies", 20),
            ("knowledge", 15),
            ("advanced", 10),
        ],
    )
    def test_totals(self, category: str, expected: int) -> None:
        assert get_category_total_weight(category, "general") == expected

    def test_unknown_category_is_zero(self) -> None:
        assert get_category_total_weight("nonexistent", "general") == 0
