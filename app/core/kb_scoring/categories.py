"""Category aggregation and total score."""

from app.core.kb_scoring.types import (
    CATEGORY_LABELS,
    CATEGORY_WEIGHTS,
    CategoryScore,
    CategoryStatus,
    FieldQualityResult,
)


def score_to_status(score: float) -> CategoryStatus:
    """Map a 0-100 score to a category status (lower bounds inclusive)."""
    if score >= 90:
        return "excellent"
    if score >= 70:
        return "good"
    if score >= 50:
        return "needs_work"
    return "critical"


def calculate_category_score(
    category: str,
    field_results: list[FieldQualityResult],
) -> CategoryScore:
    """
    Roll field results up into one category score.

    A category with no applicable fields scores 100 so it does not drag the
    total down for verticals that leave it empty.

    Args:
        category: Category to aggregate
        field_results: All field results of the run (other categories are ignored)

    Returns:
        CategoryScore for the category
    """
    category_fields = [f for f in field_results if f.category == category]

    earned_points = sum(f.weighted_score for f in category_fields)
    possible_points = sum(f.max_possible_score for f in category_fields)

    if possible_points > 0:
        score = round(100 * earned_points / possible_points)
        score = min(100, max(0, score))
    else:
        score = 100

    return CategoryScore(
        category=category,
        label=CATEGORY_LABELS.get(category, category),
        score=score,
        max_score=CATEGORY_WEIGHTS[category],
        earned_points=round(earned_points, 2),
        possible_points=possible_points,
        completed_fields=sum(1 for f in category_fields if f.status == "complete"),
        total_fields=len(category_fields),
        status=score_to_status(score),
    )


def calculate_category_scores(
    field_results: list[FieldQualityResult],
) -> dict[str, CategoryScore]:
    """Score every category, in fixed category order."""
    return {
        category: calculate_category_score(category, field_results)
        for category in CATEGORY_WEIGHTS
    }


def calculate_total_score(category_scores: dict[str, CategoryScore]) -> int:
    """Weight each category score by its fixed percentage and sum to 0-100."""
    total = sum(
        category_scores[category].score * weight / 100
        for category, weight in CATEGORY_WEIGHTS.items()
        if category in category_scores
    )
    return min(100, max(0, round(total)))
