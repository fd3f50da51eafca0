"""Tests for KB scoring display helpers and suggested content."""

import pytest

from app.core.kb_scoring.display import (
    get_category_icon,
    get_category_label,
    get_status_color,
)
from app.core.kb_scoring.suggestions import (
    count_suggestions,
    get_essential_suggestions,
    get_suggestions_by_priority,
    get_suggestions_for_vertical,
    get_verticals_with_suggestions,
    has_suggestions,
)
from app.core.kb_scoring.types import CATEGORY_WEIGHTS, KBDataForScoring
from app.core.kb_scoring.validators import validate_all_fields


class TestStatusColor:
    """get_status_color is total."""

    @pytest.mark.parametrize(
        "status",
        ["excellent", "good", "needs_work", "critical", "complete", "partial", "placeholder", "missing", "disabled"],
    )
    def test_known_statuses(self, status: str) -> None:
        colors = get_status_color(status)
        assert set(colors) == {"bg", "text", "border", "light"}

    def test_unknown_status_defaults_to_missing(self) -> None:
        assert get_status_color("exploded") == get_status_color("missing")

    def test_returns_copy(self) -> None:
        colors = get_status_color("good")
        colors["bg"] = "changed"
        assert get_status_color("good")["bg"] == "bg-blue-500"


class TestCategoryDisplay:
    """Category icon and label lookups."""

    def test_helpers_exported_from_package(self) -> None:
        import app.core.kb_scoring as kb_scoring

        assert kb_scoring.get_category_label is get_category_label
        assert kb_scoring.get_category_icon is get_category_icon
        assert kb_scoring.get_status_color is get_status_color

    def test_every_category_has_icon(self) -> None:
        icons = {get_category_icon(c) for c in CATEGORY_WEIGHTS}
        assert len(icons) == len(CATEGORY_WEIGHTS)

    def test_unknown_category_icon(self) -> None:
        assert get_category_icon("mystery") == "📁"

    def test_labels(self) -> None:
        assert get_category_label("core_data") == "Business Data"
        assert get_category_label("mystery") == "mystery"


class TestSuggestions:
    """Tests for the suggested content registry."""

    def test_registered_verticals(self) -> None:
        assert get_verticals_with_suggestions() == ["dental", "restaurant"]
        assert has_suggestions("dental") is True
        assert has_suggestions("gym") is False

    def test_unknown_vertical(self) -> None:
        assert get_suggestions_for_vertical("gym") is None
        assert get_suggestions_by_priority("gym", "essential") == []
        assert count_suggestions("gym")["total"] == 0

    def test_counts(self) -> None:
        counts = count_suggestions("dental")
        assert counts["total"] == 7
        assert counts["essential"] == 4
        assert counts["recommended"] == 3
        assert counts["optional"] == 0
        assert counts["instructions"] + counts["policies"] + counts["articles"] + counts["templates"] == 7

    def test_essential_filter(self) -> None:
        items = get_essential_suggestions("restaurant")
        assert {i.id for i in items} == {"rest-inst-identity", "rest-tpl-greeting"}

    def test_dental_suggestions_satisfy_catalog_fields(self) -> None:
        """Applying the dental starter content completes the fields it targets."""
        suggestions = get_suggestions_for_vertical("dental")
        data = KBDataForScoring(
            instructions=[
                {"instruction_type": i.category, "instruction": i.content, "is_active": True}
                for i in suggestions.instructions
            ],
            policies=[
                {"policy_type": p.category, "policy_text": p.content, "is_active": True}
                for p in suggestions.policies
            ],
            articles=[
                {"category": a.category, "content": a.content, "is_active": True}
                for a in suggestions.articles
            ],
            templates=[
                {"trigger_type": t.category, "template_text": t.content, "is_active": True}
                for t in suggestions.templates
            ],
        )

        results = {r.field_key: r for r in validate_all_fields(data, "dental")}

        for key in ("identity", "communication_style", "cancellation_policy", "greeting", "farewell"):
            assert results[key].status == "complete", key
            assert not results[key].is_placeholder
