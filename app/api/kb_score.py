"""API endpoints for knowledge base scoring."""

from typing import Any

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, Field

from app.core.kb_scoring import (
    KBScoringResult,
    KBStatusSummary,
    ScoreableField,
    ScoringRecommendation,
    calculate_kb_score,
    convert_kb_data_for_scoring,
    get_fields_for_vertical,
    get_kb_status_summary,
    get_next_step,
)
from app.core.kb_scoring.suggestions import VerticalSuggestions, get_suggestions_for_vertical
from app.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


class KBScoreRequest(BaseModel):
    """Snapshot to score."""

    vertical: str | None = Field(None, description="Business vertical (defaults from settings)")
    data: dict[str, Any] = Field(
        default_factory=dict,
        description="KB collections: instructions, policies, articles, templates, competitors",
    )
    additional_data: dict[str, Any] | None = Field(
        None, description="Business collections: services, branches, staff"
    )


class KBScoreSummaryResponse(BaseModel):
    """Digest of a scoring run."""

    total_score: int
    summary: KBStatusSummary
    next_step: ScoringRecommendation | None = None


def _score_request(request: KBScoreRequest) -> KBScoringResult:
    snapshot = convert_kb_data_for_scoring(request.data, request.additional_data)
    return calculate_kb_score(snapshot, request.vertical)


@router.post("/kb-score", response_model=KBScoringResult)
async def score_knowledge_base(request: KBScoreRequest) -> KBScoringResult:
    """
    Score a KB snapshot.

    Args:
        request: Snapshot collections and vertical

    Returns:
        KBScoringResult with category breakdown and recommendations

    Raises:
        HTTPException 500: If scoring fails
    """
    try:
        return _score_request(request)
    except Exception as e:
        logger.exception(f"Failed to score KB for vertical {request.vertical}")
        raise HTTPException(status_code=500, detail="Failed to compute KB score") from e


@router.post("/kb-score/summary", response_model=KBScoreSummaryResponse)
async def summarize_knowledge_base(request: KBScoreRequest) -> KBScoreSummaryResponse:
    """Score a KB snapshot and return only the status digest and next step."""
    try:
        result = _score_request(request)
    except Exception as e:
        logger.exception(f"Failed to summarize KB for vertical {request.vertical}")
        raise HTTPException(status_code=500, detail="Failed to compute KB score") from e

    return KBScoreSummaryResponse(
        total_score=result.total_score,
        summary=get_kb_status_summary(result),
        next_step=get_next_step(result),
    )


@router.get("/kb-score/fields", response_model=list[ScoreableField])
async def list_scoreable_fields(
    vertical: str | None = Query(None, description="Apply this vertical's overrides"),
) -> list[ScoreableField]:
    """List the field catalog, resolved for a vertical."""
    return get_fields_for_vertical(vertical)


@router.get("/kb-score/suggestions/{vertical}", response_model=VerticalSuggestions)
async def get_vertical_suggestions(vertical: str) -> VerticalSuggestions:
    """Get suggested starter content for a vertical."""
    suggestions = get_suggestions_for_vertical(vertical)
    if suggestions is None:
        raise HTTPException(status_code=404, detail=f"No suggestions for vertical '{vertical}'")
    return suggestions
