"""Per-field quality evaluation.

Each field is scored on three axes (0-100 each):
- Existence: is there an active matching record?
- Completeness: does it meet the minimum length/count?
- Quality: length relative to ideal, keyword coverage, placeholder/generic penalties

The mean of the three, scaled by the field weight, is the field's point
contribution to its category.
"""

from dataclasses import dataclass, field as dc_field
from typing import Any

from app.core.kb_scoring.fields import get_fields_for_vertical
from app.core.kb_scoring.placeholders import PlaceholderDetectionResult, detect_placeholder
from app.core.kb_scoring.types import (
    COLLECTION_CONTENT_ATTRS,
    COLLECTION_TYPE_ATTRS,
    FieldQualityResult,
    FieldStatus,
    KBDataForScoring,
    QualityIssue,
    ScoreableField,
)

# Quality blend for content fields (must sum to 1.0)
LENGTH_QUALITY_SHARE = 0.8
KEYWORD_QUALITY_SHARE = 0.2

GENERIC_PENALTY = 20
# Fraction of the quality score kept when content is filler
PLACEHOLDER_QUALITY_FACTOR = 0.1


@dataclass
class _Extraction:
    """Records matched for one field."""

    active: list[dict[str, Any]] = dc_field(default_factory=list)
    inactive: list[dict[str, Any]] = dc_field(default_factory=list)
    content: str = ""

    @property
    def found(self) -> bool:
        return bool(self.active or self.inactive)


# =============================================================================
# Matching
# =============================================================================


def _extract(field: ScoreableField, data: KBDataForScoring) -> _Extraction:
    """Find records matching the field's data source selector."""
    extraction = _Extraction()
    type_attr = COLLECTION_TYPE_ATTRS.get(field.data_source)

    for record in data.collection(field.data_source):
        is_active = record.get("is_active")
        if not isinstance(is_active, bool):
            continue
        if field.filter_type and type_attr and record.get(type_attr) != field.filter_type:
            continue
        if field.required_attribute and not record.get(field.required_attribute):
            continue

        if is_active:
            extraction.active.append(record)
        else:
            extraction.inactive.append(record)

    # First active record in snapshot order wins for content fields
    if not field.count_based and extraction.active:
        raw = extraction.active[0].get(COLLECTION_CONTENT_ATTRS[field.data_source])
        extraction.content = str(raw).strip() if raw is not None else ""

    return extraction


# =============================================================================
# Sub-scores
# =============================================================================


def _count_completeness(count: int, min_count: int) -> float:
    return min(100.0, 100.0 * count / min_count)


def _length_completeness(length: int, min_length: int) -> float:
    if min_length <= 0 or length >= min_length:
        return 100.0
    return 100.0 * length / min_length


def _content_quality(
    content: str,
    field: ScoreableField,
    placeholder: PlaceholderDetectionResult,
    missing_keywords: list[str],
) -> float:
    """Blend length and keyword coverage, then apply filler penalties."""
    length = len(content)
    if length == 0:
        return 0.0

    if field.ideal_length <= 0:
        length_component = 100.0
    else:
        length_component = min(100.0, 100.0 * length / field.ideal_length)

    keywords = field.must_contain_keywords
    if keywords:
        present = len(keywords) - len(missing_keywords)
        keyword_component = 100.0 * present / len(keywords)
    else:
        keyword_component = 100.0

    score = LENGTH_QUALITY_SHARE * length_component + KEYWORD_QUALITY_SHARE * keyword_component

    if placeholder.is_generic:
        score = max(0.0, score - GENERIC_PENALTY)
    if placeholder.is_placeholder:
        score *= PLACEHOLDER_QUALITY_FACTOR

    return score


def _missing_keywords(content: str, keywords: tuple[str, ...]) -> list[str]:
    lowered = content.lower()
    return [k for k in keywords if k.lower() not in lowered]


# =============================================================================
# Main Validation
# =============================================================================


def validate_field(field: ScoreableField, data: KBDataForScoring) -> FieldQualityResult:
    """
    Evaluate one resolved field against the KB snapshot.

    Args:
        field: Field definition with vertical overrides already applied
        data: KB snapshot

    Returns:
        FieldQualityResult with sub-scores, status, and issues
    """
    extraction = _extract(field, data)
    label = field.label
    essential = field.priority == "essential"
    issues: list[QualityIssue] = []

    item_count = len(extraction.active)
    content = extraction.content
    content_length = len(content)

    placeholder = (
        detect_placeholder(content)
        if not field.count_based
        else PlaceholderDetectionResult()
    )

    existence_score = 100.0 if extraction.active else 0.0
    missing_keywords: list[str] = []

    if not extraction.active:
        quality_score = 0.0
        completeness_score = 0.0
        below_minimum = True
    elif field.count_based:
        completeness_score = _count_completeness(item_count, field.min_count)
        quality_score = completeness_score
        below_minimum = item_count < field.min_count
    else:
        missing_keywords = _missing_keywords(content, field.must_contain_keywords)
        completeness_score = _length_completeness(content_length, field.min_length)
        quality_score = _content_quality(content, field, placeholder, missing_keywords)
        below_minimum = content_length < field.min_length

    # ==========================================================================
    # Status (checked in order)
    # ==========================================================================
    status: FieldStatus
    if not extraction.found:
        status = "missing"
    elif not extraction.active:
        status = "disabled"
    elif placeholder.is_placeholder:
        status = "placeholder"
    elif below_minimum:
        status = "partial"
    else:
        status = "complete"

    # ==========================================================================
    # Issues
    # ==========================================================================
    if status == "missing":
        issues.append(QualityIssue(
            code="NOT_CONFIGURED",
            severity="critical" if essential else "warning",
            message=f"{label} is not configured",
            suggestion=f"Configure {label} so the assistant can answer with it",
        ))
    elif status == "disabled":
        issues.append(QualityIssue(
            code="DISABLED",
            severity="warning",
            message=f"{label} exists but is disabled",
            suggestion=f"Activate {label} or replace it with an active entry",
        ))
    else:
        if placeholder.is_placeholder:
            issues.append(QualityIssue(
                code="PLACEHOLDER_DETECTED",
                severity="critical",
                message=(
                    f"{label} looks like placeholder content: "
                    f"{', '.join(placeholder.matched_patterns)}"
                ),
                suggestion=f"Replace the test content in {label} with real business information",
            ))

        if field.count_based and item_count < field.min_count:
            issues.append(QualityIssue(
                code="INSUFFICIENT_ITEMS",
                severity="critical" if essential else "warning",
                message=f"Only {item_count} of {field.min_count} {label} configured",
                suggestion=f"Add at least {field.min_count - item_count} more to {label}",
            ))

        if not field.count_based and content_length < field.min_length:
            issues.append(QualityIssue(
                code="TOO_SHORT",
                severity="critical" if essential else "warning",
                message=(
                    f"{label} is too short ({content_length} characters, "
                    f"minimum {field.min_length})"
                ),
                suggestion=f"Expand {label} to at least {field.min_length} characters",
            ))

        if missing_keywords:
            issues.append(QualityIssue(
                code="MISSING_KEYWORDS",
                severity="warning",
                message=f"{label} does not mention: {', '.join(missing_keywords)}",
                suggestion=f"Mention {', '.join(missing_keywords)} in {label}",
            ))

        if placeholder.is_generic:
            issues.append(QualityIssue(
                code="GENERIC_CONTENT",
                severity="info",
                message=f"{label} reads as generic marketing copy",
                suggestion=f"Personalize {label} with details specific to your business",
            ))

    suggestions = [issue.suggestion for issue in issues if issue.suggestion]

    field_score = (existence_score + quality_score + completeness_score) / 3
    weighted_score = field.weight * field_score / 100

    return FieldQualityResult(
        field_key=field.key,
        field_label=label,
        category=field.category,
        priority=field.priority,
        existence_score=round(existence_score, 1),
        quality_score=round(quality_score, 1),
        completeness_score=round(completeness_score, 1),
        field_score=round(field_score, 1),
        weighted_score=round(weighted_score, 2),
        max_possible_score=field.weight,
        status=status,
        issues=issues,
        suggestions=suggestions,
        content_length=content_length,
        item_count=item_count,
        is_placeholder=placeholder.is_placeholder,
        is_generic=placeholder.is_generic,
    )


def validate_all_fields(data: KBDataForScoring, vertical: str | None) -> list[FieldQualityResult]:
    """Evaluate every catalog field for `vertical`, in catalog order."""
    return [validate_field(f, data) for f in get_fields_for_vertical(vertical)]
