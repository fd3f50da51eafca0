"""Recommendation building and prioritization.

Every field that is not complete gets exactly one recommendation. The list
is ordered by how many total-score points completing the field would add.
"""

from app.core.kb_scoring.types import (
    CATEGORY_WEIGHTS,
    RECOMMENDATION_PRIORITY_RANK,
    FieldQualityResult,
    RecommendationPriority,
    ScoringRecommendation,
)

_STATUS_MESSAGES = {
    "missing": "{label} is not configured",
    "disabled": "{label} is disabled",
    "placeholder": "{label} contains placeholder content",
    "partial": "{label} is incomplete",
}


def recommendation_priority(field_priority: str, status: str) -> RecommendationPriority:
    """Map field priority and status to a recommendation priority."""
    if field_priority == "essential":
        return "critical" if status in ("missing", "disabled") else "high"
    if field_priority == "recommended":
        return "high" if status in ("missing", "disabled") else "medium"
    return "low"


def estimate_impact(result: FieldQualityResult) -> float:
    """Ranking weight for completing this field; not literal total-score points."""
    missing_points = max(0.0, result.max_possible_score - result.weighted_score)
    return round(missing_points * CATEGORY_WEIGHTS[result.category] / 100, 2)


def build_recommendation(result: FieldQualityResult) -> ScoringRecommendation:
    """Build the recommendation for one non-complete field."""
    label = result.field_label
    message = _STATUS_MESSAGES.get(result.status, "{label} needs attention").format(label=label)
    suggestion = result.suggestions[0] if result.suggestions else f"Complete {label}"

    return ScoringRecommendation(
        priority=recommendation_priority(result.priority, result.status),
        field_key=result.field_key,
        field_label=label,
        category=result.category,
        message=message,
        suggestion=suggestion,
        estimated_impact=estimate_impact(result),
    )


def build_recommendations(field_results: list[FieldQualityResult]) -> list[ScoringRecommendation]:
    """
    Build and sort recommendations for every non-complete field.

    Sort order:
    1. Estimated impact (desc)
    2. Priority (critical > high > medium > low)
    3. Category weight (desc)
    4. Field key (asc)

    Args:
        field_results: All field results of the run

    Returns:
        Fully ordered list of recommendations
    """
    recommendations = [
        build_recommendation(result)
        for result in field_results
        if result.status != "complete"
    ]

    recommendations.sort(
        key=lambda r: (
            -r.estimated_impact,
            RECOMMENDATION_PRIORITY_RANK[r.priority],
            -CATEGORY_WEIGHTS[r.category],
            r.field_key,
        )
    )

    return recommendations
