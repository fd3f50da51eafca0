"""Placeholder and generic-content heuristics for KB text.

Only simple pattern checks are done here. A hit on any placeholder marker
flags the whole text as filler; generic content needs several stock phrases.
"""

import re

from pydantic import BaseModel, Field

PLACEHOLDER_PATTERNS: dict[str, re.Pattern[str]] = {
    "lorem_ipsum": re.compile(r"lorem\s+ipsum", re.IGNORECASE),
    "placeholder": re.compile(r"placeholder", re.IGNORECASE),
    # Bare "test 1" style filler; "blood test" or "prueba de embarazo" is real copy
    "test_content": re.compile(r"^\s*(test|testing|prueba)\s*\d*\s*[.!]?\s*$", re.IGNORECASE),
    "test_phrase": re.compile(
        r"\b(this\s+is\s+a\s+test|test\s+content|texto\s+de\s+prueba|contenido\s+de\s+prueba)\b",
        re.IGNORECASE,
    ),
    # Uppercase only: "todo" is an everyday Spanish word
    "todo_marker": re.compile(r"\b(TODO|TBD|FIXME)\b"),
    "insert_marker": re.compile(r"\[\s*(insert|insertar|your)[^\]]*\]", re.IGNORECASE),
    "template_variable": re.compile(r"\{\{[^}]*\}\}"),
    "filler_chars": re.compile(r"\b(x{3,}|asdf\w*|qwerty\w*)\b", re.IGNORECASE),
    "sample_text": re.compile(r"\b(sample|example|dummy)\s+text\b", re.IGNORECASE),
    "coming_soon": re.compile(r"\bcoming\s+soon\b", re.IGNORECASE),
    "business_name_stub": re.compile(r"\byour\s+business\s+name\b", re.IGNORECASE),
    "spanish_sample": re.compile(r"\btexto\s+de\s+ejemplo\b", re.IGNORECASE),
}

GENERIC_PHRASES: tuple[str, ...] = (
    "best service",
    "high quality",
    "customer satisfaction",
    "we are the best",
    "excellent service",
    "competitive prices",
    "your satisfaction is our priority",
    "we offer a wide range",
    "professional team",
    "many years of experience",
)

# Distinct stock phrases needed before text counts as generic
GENERIC_MIN_HITS = 2


class PlaceholderDetectionResult(BaseModel):
    """Outcome of the placeholder/generic checks for one text."""

    is_placeholder: bool = False
    is_generic: bool = False
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    matched_patterns: list[str] = Field(default_factory=list)


def detect_placeholder(text: str | None) -> PlaceholderDetectionResult:
    """
    Check text for placeholder markers and generic marketing filler.

    Args:
        text: Field content (may be empty)

    Returns:
        PlaceholderDetectionResult with the names of the matched patterns
    """
    if not text or not text.strip():
        return PlaceholderDetectionResult()

    matched = [name for name, pattern in PLACEHOLDER_PATTERNS.items() if pattern.search(text)]

    lowered = text.lower()
    generic_hits = [phrase for phrase in GENERIC_PHRASES if phrase in lowered]
    is_generic = len(generic_hits) >= GENERIC_MIN_HITS

    if matched:
        confidence = min(1.0, 0.6 + 0.2 * (len(matched) - 1))
    elif is_generic:
        confidence = min(1.0, 0.3 + 0.1 * len(generic_hits))
    else:
        confidence = 0.0

    return PlaceholderDetectionResult(
        is_placeholder=bool(matched),
        is_generic=is_generic,
        confidence=round(confidence, 2),
        matched_patterns=matched,
    )


def detect_generic_content(text: str | None) -> bool:
    """Check whether text is mostly stock marketing phrases."""
    return detect_placeholder(text).is_generic
