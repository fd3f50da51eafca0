"""Knowledge base scoring system.

Scores how ready a business's KB configuration is to drive the assistant,
across 5 fixed categories:
- Business Data (30%): services, branches, staff, hours
- Personality (25%): identity, greeting, farewell, style
- Policies (20%): cancellation, payment, pricing, warranty
- Knowledge (15%): articles, about us, differentiators
- Advanced (10%): competitor handling, upselling, templates

Usage:
    from app.core.kb_scoring import calculate_kb_score

    result = calculate_kb_score(snapshot, vertical="dental")
    print(f"KB score: {result.total_score}/100")
"""

from app.core.kb_scoring.categories import (
    calculate_category_score,
    calculate_category_scores,
    calculate_total_score,
    score_to_status,
)
from app.core.kb_scoring.display import get_category_icon, get_category_label, get_status_color
from app.core.kb_scoring.fields import (
    SCOREABLE_FIELDS,
    apply_vertical_override,
    get_category_total_weight,
    get_field_definition,
    get_fields_for_vertical,
)
from app.core.kb_scoring.recommendations import build_recommendations
from app.core.kb_scoring.score import (
    calculate_kb_score,
    convert_kb_data_for_scoring,
    get_kb_status_summary,
    get_next_step,
)
from app.core.kb_scoring.types import (
    CATEGORY_LABELS,
    CATEGORY_WEIGHTS,
    QUALITY_THRESHOLDS,
    CategoryScore,
    FieldQualityResult,
    KBDataForScoring,
    KBScoringResult,
    KBStatusSummary,
    QualityIssue,
    ScoreableField,
    ScoringRecommendation,
    ScoringStats,
)
from app.core.kb_scoring.validators import validate_all_fields, validate_field

__all__ = [
    "calculate_kb_score",
    "convert_kb_data_for_scoring",
    "get_kb_status_summary",
    "get_next_step",
    "SCOREABLE_FIELDS",
    "apply_vertical_override",
    "get_field_definition",
    "get_fields_for_vertical",
    "get_category_total_weight",
    "validate_field",
    "validate_all_fields",
    "calculate_category_score",
    "calculate_category_scores",
    "calculate_total_score",
    "score_to_status",
    "build_recommendations",
    "KBScoringResult",
    "KBDataForScoring",
    "KBStatusSummary",
    "CategoryScore",
    "FieldQualityResult",
    "QualityIssue",
    "ScoreableField",
    "ScoringRecommendation",
    "ScoringStats",
    "CATEGORY_WEIGHTS",
    "CATEGORY_LABELS",
    "get_category_label",
    "get_category_icon",
    "get_status_color",
    "QUALITY_THRESHOLDS",
]
