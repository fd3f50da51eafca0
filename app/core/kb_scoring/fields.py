"""Scoreable field catalog and vertical override resolution.

The catalog is a process-wide constant. Vertical differences are expressed
as shallow patches applied on read, never as a stored derived catalog.
"""

from app.core.kb_scoring.types import QUALITY_THRESHOLDS, ScoreableField

_MIN = QUALITY_THRESHOLDS["MIN_LENGTHS"]
_IDEAL = QUALITY_THRESHOLDS["IDEAL_LENGTHS"]


# =============================================================================
# Field Definitions
# =============================================================================

SCOREABLE_FIELDS: tuple[ScoreableField, ...] = (
    # -------------------------------------------------------------------------
    # Core data (30%)
    # -------------------------------------------------------------------------
    ScoreableField(
        key="services_configured",
        label="Configured services",
        category="core_data",
        weight=10,
        priority="essential",
        data_source="services",
        count_based=True,
        min_count=3,
        vertical_overrides={
            "dental": {"min_count": 5, "label": "Dental treatments"},
            "restaurant": {"min_count": 5, "label": "Menu items"},
            "gym": {"min_count": 3, "label": "Memberships and classes"},
        },
    ),
    ScoreableField(
        key="branches_configured",
        label="Branches",
        category="core_data",
        weight=8,
        priority="essential",
        data_source="branches",
        count_based=True,
        min_count=1,
    ),
    ScoreableField(
        key="staff_configured",
        label="Professional staff",
        category="core_data",
        weight=7,
        priority="recommended",
        data_source="staff",
        count_based=True,
        min_count=1,
        vertical_overrides={
            "dental": {"priority": "essential", "label": "Dentists and specialists"},
            "clinic": {"priority": "essential", "label": "Physicians"},
        },
    ),
    ScoreableField(
        key="business_hours",
        label="Business hours",
        category="core_data",
        weight=5,
        priority="essential",
        data_source="branches",
        count_based=True,
        min_count=1,
        required_attribute="operating_hours",
    ),
    # -------------------------------------------------------------------------
    # Personality (25%)
    # -------------------------------------------------------------------------
    ScoreableField(
        key="identity",
        label="Assistant identity",
        category="personality",
        weight=10,
        priority="essential",
        min_length=_MIN["identity"],
        ideal_length=_IDEAL["identity"],
        must_contain_keywords=("name", "personality", "tone"),
        data_source="instructions",
        filter_type="identity",
    ),
    ScoreableField(
        key="greeting",
        label="Greeting message",
        category="personality",
        weight=6,
        priority="essential",
        min_length=_MIN["greeting"],
        ideal_length=_IDEAL["greeting"],
        data_source="templates",
        filter_type="greeting",
    ),
    ScoreableField(
        key="farewell",
        label="Farewell message",
        category="personality",
        weight=4,
        priority="essential",
        min_length=_MIN["farewell"],
        ideal_length=_IDEAL["farewell"],
        data_source="templates",
        filter_type="farewell",
    ),
    ScoreableField(
        key="communication_style",
        label="Communication style",
        category="personality",
        weight=5,
        priority="recommended",
        min_length=_MIN["instruction"],
        ideal_length=_IDEAL["instruction"],
        data_source="instructions",
        filter_type="communication_style",
    ),
    # -------------------------------------------------------------------------
    # Policies (20%)
    # -------------------------------------------------------------------------
    ScoreableField(
        key="cancellation_policy",
        label="Cancellation policy",
        category="policies",
        weight=7,
        priority="recommended",
        min_length=_MIN["policy"],
        ideal_length=_IDEAL["policy"],
        must_contain_keywords=("cancel", "advance", "notice"),
        data_source="policies",
        filter_type="cancellation",
        vertical_overrides={
            "dental": {"priority": "essential"},
            "clinic": {"priority": "essential"},
            "beauty": {"priority": "essential"},
        },
    ),
    ScoreableField(
        key="payment_policy",
        label="Payment policy",
        category="policies",
        weight=6,
        priority="recommended",
        min_length=_MIN["policy"],
        ideal_length=_IDEAL["policy"],
        must_contain_keywords=("payment", "method", "cash", "card"),
        data_source="policies",
        filter_type="payment",
    ),
    ScoreableField(
        key="pricing_policy",
        label="Pricing policy",
        category="policies",
        weight=4,
        priority="optional",
        min_length=_MIN["policy"],
        ideal_length=_IDEAL["policy"],
        data_source="policies",
        filter_type="pricing",
    ),
    ScoreableField(
        key="warranty_policy",
        label="Warranty policy",
        category="policies",
        weight=3,
        priority="optional",
        min_length=_MIN["policy"],
        ideal_length=_IDEAL["policy"],
        data_source="policies",
        filter_type="warranty",
        vertical_overrides={
            "dental": {"priority": "recommended", "label": "Treatment warranty"},
        },
    ),
    # -------------------------------------------------------------------------
    # Knowledge (15%)
    # -------------------------------------------------------------------------
    ScoreableField(
        key="knowledge_articles",
        label="Knowledge articles",
        category="knowledge",
        weight=6,
        priority="recommended",
        data_source="articles",
        count_based=True,
        min_count=2,
    ),
    ScoreableField(
        key="about_us",
        label="About us",
        category="knowledge",
        weight=5,
        priority="recommended",
        min_length=_MIN["article"],
        ideal_length=_IDEAL["article"],
        data_source="articles",
        filter_type="about_us",
    ),
    ScoreableField(
        key="differentiators",
        label="Differentiators",
        category="knowledge",
        weight=4,
        priority="optional",
        min_length=_MIN["article"],
        ideal_length=_IDEAL["article"],
        data_source="articles",
        filter_type="differentiators",
    ),
    # -------------------------------------------------------------------------
    # Advanced (10%)
    # -------------------------------------------------------------------------
    ScoreableField(
        key="competitor_handling",
        label="Competitor handling",
        category="advanced",
        weight=5,
        priority="optional",
        data_source="competitors",
        count_based=True,
        min_count=1,
    ),
    ScoreableField(
        key="upselling_instructions",
        label="Upselling instructions",
        category="advanced",
        weight=3,
        priority="optional",
        min_length=_MIN["instruction"],
        ideal_length=_IDEAL["instruction"],
        data_source="instructions",
        filter_type="upselling",
    ),
    ScoreableField(
        key="response_templates",
        label="Response templates",
        category="advanced",
        weight=2,
        priority="optional",
        data_source="templates",
        count_based=True,
        min_count=3,
    ),
)

_FIELDS_BY_KEY: dict[str, ScoreableField] = {f.key: f for f in SCOREABLE_FIELDS}


# =============================================================================
# Override Resolution
# =============================================================================


def apply_vertical_override(field: ScoreableField, vertical: str | None) -> ScoreableField:
    """
    Shallow-merge the override registered for `vertical` on top of `field`.

    Overridden attributes are replaced wholesale; nothing is deep-merged.
    The base definition is never mutated. Unknown verticals return the base
    field unchanged.
    """
    overrides = field.vertical_overrides.get(vertical) if vertical else None
    if not overrides:
        return field
    return field.model_copy(update=overrides)


def get_field_definition(field_key: str, vertical: str | None) -> ScoreableField | None:
    """Get a field definition adjusted for `vertical`, or None if the key is unknown."""
    base_field = _FIELDS_BY_KEY.get(field_key)
    if base_field is None:
        return None
    return apply_vertical_override(base_field, vertical)


def get_fields_for_vertical(vertical: str | None) -> list[ScoreableField]:
    """Get the full catalog, in catalog order, with `vertical` overrides applied."""
    return [apply_vertical_override(f, vertical) for f in SCOREABLE_FIELDS]


def get_fields_by_category(category: str, vertical: str | None) -> list[ScoreableField]:
    """Get the resolved fields belonging to `category`."""
    return [f for f in get_fields_for_vertical(vertical) if f.category == category]


def get_category_total_weight(category: str, vertical: str | None) -> int:
    """Sum of the (possibly overridden) weights of the fields in `category`."""
    return sum(f.weight for f in get_fields_by_category(category, vertical))
