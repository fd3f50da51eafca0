"""Main KB score computation.

This module orchestrates KB scoring by:
1. Resolving the field catalog for the vertical
2. Evaluating every field against the snapshot
3. Aggregating by category and weighting the total
4. Ranking recommendations

Everything is computed fresh from the snapshot; nothing is cached.
"""

import logging
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from app.core.config import get_settings
from app.core.kb_scoring.categories import (
    calculate_category_scores,
    calculate_total_score,
    score_to_status,
)
from app.core.kb_scoring.recommendations import build_recommendations
from app.core.kb_scoring.types import (
    FieldQualityResult,
    KBDataForScoring,
    KBScoringResult,
    KBStatusSummary,
    ScoringRecommendation,
    ScoringStats,
)
from app.core.kb_scoring.validators import validate_all_fields
from app.core.logging import get_logger, log_with_context

logger = get_logger(__name__)

KB_COLLECTIONS = ("instructions", "policies", "articles", "templates", "competitors")
BUSINESS_COLLECTIONS = ("services", "branches", "staff")

_STATUS_LABELS = {
    "excellent": "Excellent",
    "good": "Good",
    "needs_work": "Needs work",
    "critical": "Critical",
}

_STATUS_MESSAGES = {
    "excellent": "Your knowledge base is ready to power the assistant",
    "good": "Your knowledge base is in good shape with a few gaps",
    "needs_work": "Your knowledge base needs more detail before going live",
    "critical": "Your knowledge base is missing essential information",
}


def calculate_kb_score(
    data: KBDataForScoring | Mapping[str, Any],
    vertical: str | None = None,
) -> KBScoringResult:
    """
    Compute the full KB score for a snapshot.

    Args:
        data: KB snapshot (model or plain mapping of collections)
        vertical: Business vertical; defaults to KB_DEFAULT_VERTICAL

    Returns:
        KBScoringResult with category breakdown, field results, and recommendations
    """
    settings = get_settings()
    vertical = vertical or settings.KB_DEFAULT_VERTICAL

    if not isinstance(data, KBDataForScoring):
        data = KBDataForScoring.model_validate(data)

    # ==========================================================================
    # 1. Evaluate every field
    # ==========================================================================
    field_results = validate_all_fields(data, vertical)

    # ==========================================================================
    # 2. Aggregate by category and weight the total
    # ==========================================================================
    category_scores = calculate_category_scores(field_results)
    total_score = calculate_total_score(category_scores)

    for category, category_score in category_scores.items():
        log_with_context(
            logger,
            logging.DEBUG,
            f"Category {category} scored",
            vertical=vertical,
            score=category_score.score,
            earned_points=category_score.earned_points,
            possible_points=category_score.possible_points,
        )

    # ==========================================================================
    # 3. Rank recommendations
    # ==========================================================================
    recommendations = build_recommendations(field_results)
    stats = _compute_stats(field_results)

    log_with_context(
        logger,
        logging.INFO,
        "Computed KB score",
        vertical=vertical,
        scoring_version=settings.KB_SCORING_VERSION,
        total_score=total_score,
        completed=f"{stats.completed_fields}/{stats.total_fields}",
        recommendations=len(recommendations),
    )

    return KBScoringResult(
        total_score=total_score,
        category_scores=category_scores,
        field_results=field_results,
        stats=stats,
        recommendations=recommendations,
        vertical=vertical,
        calculated_at=datetime.now(UTC),
        version=settings.KB_SCORING_VERSION,
    )


def _compute_stats(field_results: list[FieldQualityResult]) -> ScoringStats:
    """Summary counts over all field results."""
    return ScoringStats(
        total_fields=len(field_results),
        completed_fields=sum(1 for f in field_results if f.status == "complete"),
        fields_with_issues=sum(1 for f in field_results if f.issues),
        critical_missing=sum(
            1 for f in field_results
            if f.priority == "essential" and f.status in ("missing", "disabled")
        ),
        placeholders_detected=sum(1 for f in field_results if f.is_placeholder),
    )


def convert_kb_data_for_scoring(
    kb_data: Mapping[str, Any],
    additional_data: Mapping[str, Any] | None = None,
) -> KBDataForScoring:
    """
    Merge KB collections with business data into a scoring snapshot.

    Args:
        kb_data: Instructions, policies, articles, templates, competitors
        additional_data: Services, branches, staff (optional)

    Returns:
        KBDataForScoring snapshot
    """
    additional_data = additional_data or {}
    merged: dict[str, Any] = {name: kb_data.get(name) for name in KB_COLLECTIONS}
    for name in BUSINESS_COLLECTIONS:
        merged[name] = additional_data.get(name, kb_data.get(name))
    return KBDataForScoring.model_validate(merged)


def get_kb_status_summary(result: KBScoringResult) -> KBStatusSummary:
    """Display-oriented digest of a scoring result."""
    settings = get_settings()
    status = score_to_status(result.total_score)

    return KBStatusSummary(
        status=status,
        label=_STATUS_LABELS[status],
        message=_STATUS_MESSAGES[status],
        production_ready=result.total_score >= settings.KB_MIN_PRODUCTION_READY,
        prompt_quality_ok=result.total_score >= settings.KB_MIN_PROMPT_QUALITY,
        critical_count=sum(1 for r in result.recommendations if r.priority == "critical"),
        placeholder_count=result.stats.placeholders_detected,
    )


def get_next_step(result: KBScoringResult) -> ScoringRecommendation | None:
    """The single most valuable recommendation, or None when nothing is left."""
    return result.recommendations[0] if result.recommendations else None
