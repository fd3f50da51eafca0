"""Pydantic models for the KB scoring system."""

from datetime import datetime
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# =============================================================================
# Literal Types
# =============================================================================

ScoringCategory = Literal[
    "core_data",    # Fundamental business data (30%)
    "personality",  # Assistant identity and tone (25%)
    "policies",     # Policies and rules (20%)
    "knowledge",    # Informational content (15%)
    "advanced",     # Advanced features (10%)
]

FieldPriority = Literal["essential", "recommended", "optional"]

FieldStatus = Literal[
    "complete",     # Present, active, meets thresholds
    "partial",      # Present but below minimum length/count
    "placeholder",  # Detected filler/test content
    "missing",      # No matching record
    "disabled",     # Matching records exist but none is active
]

CategoryStatus = Literal["excellent", "good", "needs_work", "critical"]

IssueSeverity = Literal["critical", "warning", "info"]

RecommendationPriority = Literal["critical", "high", "medium", "low"]

DataSource = Literal[
    "instructions",
    "policies",
    "articles",
    "templates",
    "competitors",
    "services",
    "branches",
    "staff",
]


# =============================================================================
# Constants
# =============================================================================

# Category weights - must sum to 100
CATEGORY_WEIGHTS: dict[str, int] = {
    "core_data": 30,
    "personality": 25,
    "policies": 20,
    "knowledge": 15,
    "advanced": 10,
}

CATEGORY_LABELS: dict[str, str] = {
    "core_data": "Business Data",
    "personality": "Personality",
    "policies": "Policies",
    "knowledge": "Knowledge",
    "advanced": "Advanced",
}

# Ordered by rank; index 0 is the most urgent
RECOMMENDATION_PRIORITY_RANK: dict[str, int] = {
    "critical": 0,
    "high": 1,
    "medium": 2,
    "low": 3,
}

# Which attribute holds the scoreable text and which one discriminates sub-types
COLLECTION_CONTENT_ATTRS: dict[str, str] = {
    "instructions": "instruction",
    "policies": "policy_text",
    "articles": "content",
    "templates": "template_text",
    "competitors": "response_strategy",
    "services": "name",
    "branches": "name",
    "staff": "first_name",
}

COLLECTION_TYPE_ATTRS: dict[str, str] = {
    "instructions": "instruction_type",
    "policies": "policy_type",
    "articles": "category",
    "templates": "trigger_type",
}

QUALITY_THRESHOLDS: dict[str, Any] = {
    # Minimum total score to consider the KB production ready
    "MIN_PRODUCTION_READY": 70,
    # Minimum total score to generate quality prompts
    "MIN_PROMPT_QUALITY": 50,
    "MIN_LENGTHS": {
        "identity": 80,
        "greeting": 30,
        "farewell": 20,
        "policy": 50,
        "article": 100,
        "instruction": 30,
        "template": 20,
        "strategy": 50,
    },
    "IDEAL_LENGTHS": {
        "identity": 200,
        "greeting": 100,
        "farewell": 50,
        "policy": 150,
        "article": 300,
        "instruction": 100,
        "template": 80,
        "strategy": 150,
    },
}


# =============================================================================
# Catalog Types
# =============================================================================


class ScoreableField(BaseModel):
    """Static rule describing one scoreable KB field."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Unique field identifier")
    label: str = Field(..., description="Human-readable label")
    category: ScoringCategory = Field(..., description="Scoring category")
    weight: int = Field(..., gt=0, description="Points within its category")
    priority: FieldPriority = Field(..., description="How important the field is")

    # Validation thresholds
    min_length: int = Field(default=0, ge=0, description="Minimum content length")
    ideal_length: int = Field(default=0, ge=0, description="Content length for full quality")
    must_contain_keywords: tuple[str, ...] = Field(
        default=(), description="Keywords the content should mention"
    )

    # Data source selector
    data_source: DataSource = Field(..., description="Snapshot collection to read")
    filter_type: Optional[str] = Field(None, description="Sub-type discriminator value")
    count_based: bool = Field(default=False, description="Score by record count, not content")
    min_count: int = Field(default=1, ge=1, description="Minimum active records (count-based)")
    required_attribute: Optional[str] = Field(
        None, description="Record attribute that must be non-empty for a record to match"
    )

    vertical_overrides: dict[str, dict[str, Any]] = Field(
        default_factory=dict, description="Partial patches keyed by vertical"
    )


# =============================================================================
# Result Types
# =============================================================================


class QualityIssue(BaseModel):
    """A problem detected while evaluating one field."""

    code: str = Field(..., description="Machine-readable issue code")
    severity: IssueSeverity = Field(..., description="Issue severity")
    message: str = Field(..., description="Human-readable description")
    suggestion: str | None = Field(None, description="How to fix it")


class FieldQualityResult(BaseModel):
    """Evaluated outcome for a single field."""

    model_config = ConfigDict(frozen=True)

    field_key: str
    field_label: str
    category: ScoringCategory
    priority: FieldPriority

    existence_score: float = Field(..., ge=0, le=100)
    quality_score: float = Field(..., ge=0, le=100)
    completeness_score: float = Field(..., ge=0, le=100)
    field_score: float = Field(..., ge=0, le=100, description="Mean of the three sub-scores")

    weighted_score: float = Field(..., ge=0, description="Points earned toward the category")
    max_possible_score: int = Field(..., gt=0, description="Field weight")

    status: FieldStatus
    issues: list[QualityIssue] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)

    content_length: int = Field(default=0, ge=0)
    item_count: int = Field(default=0, ge=0)
    is_placeholder: bool = False
    is_generic: bool = False


class CategoryScore(BaseModel):
    """Aggregated score for one category."""

    category: ScoringCategory
    label: str
    score: int = Field(..., ge=0, le=100, description="Category score out of 100")
    max_score: int = Field(..., description="Fixed category weight")
    earned_points: float = Field(..., ge=0)
    possible_points: float = Field(..., ge=0)
    completed_fields: int = Field(default=0, ge=0)
    total_fields: int = Field(default=0, ge=0)
    status: CategoryStatus


class ScoringRecommendation(BaseModel):
    """An actionable recommendation to improve the KB score."""

    priority: RecommendationPriority
    field_key: str
    field_label: str
    category: ScoringCategory
    message: str
    suggestion: str
    estimated_impact: float = Field(..., ge=0, description="Total-score points gained")


class ScoringStats(BaseModel):
    """Summary counts for a scoring run."""

    total_fields: int = 0
    completed_fields: int = 0
    fields_with_issues: int = 0
    critical_missing: int = 0
    placeholders_detected: int = 0


class KBScoringResult(BaseModel):
    """Complete scoring result for a KB snapshot."""

    total_score: int = Field(..., ge=0, le=100, description="Overall KB score")
    category_scores: dict[str, CategoryScore] = Field(
        ..., description="Breakdown by category (always every category)"
    )
    field_results: list[FieldQualityResult] = Field(default_factory=list)
    stats: ScoringStats = Field(default_factory=ScoringStats)
    recommendations: list[ScoringRecommendation] = Field(
        default_factory=list, description="Sorted by estimated impact"
    )

    # Metadata
    vertical: str
    calculated_at: datetime
    version: str


class KBStatusSummary(BaseModel):
    """Short, display-oriented digest of a scoring result."""

    status: CategoryStatus
    label: str
    message: str
    production_ready: bool
    prompt_quality_ok: bool
    critical_count: int = 0
    placeholder_count: int = 0


# =============================================================================
# Input Snapshot
# =============================================================================


class KBDataForScoring(BaseModel):
    """Read-only KB snapshot supplied by the caller."""

    instructions: list[dict[str, Any]] = Field(default_factory=list)
    policies: list[dict[str, Any]] = Field(default_factory=list)
    articles: list[dict[str, Any]] = Field(default_factory=list)
    templates: list[dict[str, Any]] = Field(default_factory=list)
    competitors: list[dict[str, Any]] = Field(default_factory=list)
    services: list[dict[str, Any]] = Field(default_factory=list)
    branches: list[dict[str, Any]] = Field(default_factory=list)
    staff: list[dict[str, Any]] = Field(default_factory=list)

    @field_validator(
        "instructions",
        "policies",
        "articles",
        "templates",
        "competitors",
        "services",
        "branches",
        "staff",
        mode="before",
    )
    @classmethod
    def _coerce_collection(cls, value: Any) -> list[dict[str, Any]]:
        """Treat absent or malformed collections as empty, drop non-dict records."""
        if not isinstance(value, (list, tuple)):
            return []
        return [item for item in value if isinstance(item, dict)]

    def collection(self, name: str) -> list[dict[str, Any]]:
        """Get a collection by data source name."""
        return getattr(self, name, None) or []
