"""Display helpers for KB scoring statuses and categories.

Pure presentation lookups. Every function is total: unknown values fall
back to a default entry instead of raising.
"""

from app.core.kb_scoring.types import CATEGORY_LABELS

_STATUS_COLORS: dict[str, dict[str, str]] = {
    "excellent": {"bg": "bg-green-500", "text": "text-green-700", "border": "border-green-500", "light": "bg-green-50"},
    "complete": {"bg": "bg-green-500", "text": "text-green-700", "border": "border-green-500", "light": "bg-green-50"},
    "good": {"bg": "bg-blue-500", "text": "text-blue-700", "border": "border-blue-500", "light": "bg-blue-50"},
    "partial": {"bg": "bg-amber-500", "text": "text-amber-700", "border": "border-amber-500", "light": "bg-amber-50"},
    "needs_work": {"bg": "bg-amber-500", "text": "text-amber-700", "border": "border-amber-500", "light": "bg-amber-50"},
    "placeholder": {"bg": "bg-orange-500", "text": "text-orange-700", "border": "border-orange-500", "light": "bg-orange-50"},
    "critical": {"bg": "bg-red-500", "text": "text-red-700", "border": "border-red-500", "light": "bg-red-50"},
    "missing": {"bg": "bg-gray-400", "text": "text-gray-600", "border": "border-gray-400", "light": "bg-gray-50"},
    "disabled": {"bg": "bg-gray-300", "text": "text-gray-500", "border": "border-gray-300", "light": "bg-gray-50"},
}

DEFAULT_STATUS = "missing"

_CATEGORY_ICONS: dict[str, str] = {
    "core_data": "📊",
    "personality": "🎭",
    "policies": "📋",
    "knowledge": "📚",
    "advanced": "⚡",
}

DEFAULT_CATEGORY_ICON = "📁"


def get_status_color(status: str) -> dict[str, str]:
    """Color classes for a field or category status (unknown -> missing palette)."""
    return dict(_STATUS_COLORS.get(status, _STATUS_COLORS[DEFAULT_STATUS]))


def get_category_icon(category: str) -> str:
    """Icon for a scoring category."""
    return _CATEGORY_ICONS.get(category, DEFAULT_CATEGORY_ICON)


def get_category_label(category: str) -> str:
    """Human-readable category label, or the raw value if unknown."""
    return CATEGORY_LABELS.get(category, category)
