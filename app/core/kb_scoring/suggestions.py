"""Suggested starter KB content per vertical.

Gives operators ready-made items that satisfy the catalog's main fields.
Item categories use the same discriminator values the field catalog filters
on (instruction_type, policy_type, article category, trigger_type).
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from app.core.kb_scoring.types import FieldPriority

SuggestedItemType = Literal["instruction", "policy", "article", "template"]


class SuggestedKBItem(BaseModel):
    """A single suggested KB entry."""

    model_config = ConfigDict(frozen=True)

    id: str
    type: SuggestedItemType
    category: str = Field(..., description="Discriminator value for its collection")
    title: str
    content: str
    priority: FieldPriority
    description: str = Field(..., description="Why this item is useful")


class VerticalSuggestions(BaseModel):
    """All suggested items for one vertical."""

    model_config = ConfigDict(frozen=True)

    vertical: str
    display_name: str
    instructions: tuple[SuggestedKBItem, ...] = ()
    policies: tuple[SuggestedKBItem, ...] = ()
    articles: tuple[SuggestedKBItem, ...] = ()
    templates: tuple[SuggestedKBItem, ...] = ()

    def all_items(self) -> list[SuggestedKBItem]:
        return [*self.instructions, *self.policies, *self.articles, *self.templates]


# =============================================================================
# Dental
# =============================================================================

DENTAL_SUGGESTIONS = VerticalSuggestions(
    vertical="dental",
    display_name="Dental clinic",
    instructions=(
        SuggestedKBItem(
            id="dental-inst-identity",
            type="instruction",
            category="identity",
            title="Dental assistant identity",
            content=(
                "Your name is Sofia, the virtual assistant of a professional dental clinic. "
                "Your personality is warm, patient and reassuring. Keep a professional tone, "
                "explain dental terms in plain language and remind patients that every "
                "procedure is performed by certified dentists."
            ),
            priority="essential",
            description="Defines how the assistant introduces itself on behalf of the clinic",
        ),
        SuggestedKBItem(
            id="dental-inst-style",
            type="instruction",
            category="communication_style",
            title="Communication with patients",
            content=(
                "Use short sentences, show empathy when a patient mentions pain and always "
                "offer the next available appointment."
            ),
            priority="recommended",
            description="Keeps answers calm and action oriented",
        ),
    ),
    policies=(
        SuggestedKBItem(
            id="dental-pol-cancellation",
            type="policy",
            category="cancellation",
            title="Appointment cancellation",
            content=(
                "Patients can cancel or reschedule with at least 24 hours advance notice at no "
                "cost. Late cancellations or missed appointments may require a deposit to book "
                "again."
            ),
            priority="essential",
            description="Sets expectations about cancellations and no-shows",
        ),
        SuggestedKBItem(
            id="dental-pol-payment",
            type="policy",
            category="payment",
            title="Payment methods",
            content=(
                "We accept payment in cash, debit or credit card and bank transfer. Every "
                "method is accepted at the front desk; long treatments can be split into "
                "monthly installments."
            ),
            priority="recommended",
            description="Answers the most common billing question",
        ),
    ),
    articles=(
        SuggestedKBItem(
            id="dental-art-about",
            type="article",
            category="about_us",
            title="About the clinic",
            content=(
                "Our clinic has cared for families in the neighborhood since 2010. The team "
                "includes general dentists, an orthodontist and an endodontist, and the clinic "
                "is equipped with digital x-rays and intraoral scanners so most diagnoses are "
                "ready during the first visit."
            ),
            priority="recommended",
            description="Gives the assistant background to build trust",
        ),
    ),
    templates=(
        SuggestedKBItem(
            id="dental-tpl-greeting",
            type="template",
            category="greeting",
            title="Greeting",
            content="Hello! Thanks for contacting the clinic. How can I help you with your smile today?",
            priority="essential",
            description="Friendly first message",
        ),
        SuggestedKBItem(
            id="dental-tpl-farewell",
            type="template",
            category="farewell",
            title="Farewell",
            content="Thank you for writing to us. We look forward to seeing you soon!",
            priority="essential",
            description="Warm closing that invites a visit",
        ),
    ),
)


# =============================================================================
# Restaurant
# =============================================================================

RESTAURANT_SUGGESTIONS = VerticalSuggestions(
    vertical="restaurant",
    display_name="Restaurant",
    instructions=(
        SuggestedKBItem(
            id="rest-inst-identity",
            type="instruction",
            category="identity",
            title="Restaurant host identity",
            content=(
                "Your name is Leo, the digital host of the restaurant. Your personality is "
                "friendly and upbeat, with a relaxed tone. Recommend dishes of the day, help "
                "guests book tables and answer questions about the menu and allergens."
            ),
            priority="essential",
            description="Defines how the assistant represents the restaurant",
        ),
        SuggestedKBItem(
            id="rest-inst-upselling",
            type="instruction",
            category="upselling",
            title="Suggestive selling",
            content=(
                "When a guest books for a celebration, mention the dessert platter and the "
                "wine pairing menu once, without insisting."
            ),
            priority="optional",
            description="Adds revenue without being pushy",
        ),
    ),
    policies=(
        SuggestedKBItem(
            id="rest-pol-cancellation",
            type="policy",
            category="cancellation",
            title="Reservation cancellation",
            content=(
                "Reservations can be cancelled with two hours advance notice. Groups of eight "
                "or more must give 24 hours notice to cancel without a charge."
            ),
            priority="recommended",
            description="Protects peak-hour tables",
        ),
    ),
    templates=(
        SuggestedKBItem(
            id="rest-tpl-greeting",
            type="template",
            category="greeting",
            title="Greeting",
            content="Welcome! Would you like to book a table or take a look at today's menu?",
            priority="essential",
            description="Opens with the two most common intents",
        ),
        SuggestedKBItem(
            id="rest-tpl-after-hours",
            type="template",
            category="after_hours",
            title="After hours",
            content=(
                "Thanks for your message. We are closed right now, but I can book a table for "
                "when we open. We serve every day from 1 pm to 11 pm."
            ),
            priority="recommended",
            description="Captures intent while the restaurant is closed",
        ),
    ),
)


SUGGESTIONS_BY_VERTICAL: dict[str, VerticalSuggestions] = {
    "dental": DENTAL_SUGGESTIONS,
    "restaurant": RESTAURANT_SUGGESTIONS,
}


def get_suggestions_for_vertical(vertical: str) -> VerticalSuggestions | None:
    """Get suggestions for a vertical, or None if it has none."""
    return SUGGESTIONS_BY_VERTICAL.get(vertical)


def get_verticals_with_suggestions() -> list[str]:
    return list(SUGGESTIONS_BY_VERTICAL)


def has_suggestions(vertical: str) -> bool:
    return vertical in SUGGESTIONS_BY_VERTICAL


def get_suggestions_by_priority(vertical: str, priority: FieldPriority) -> list[SuggestedKBItem]:
    """Suggested items of one priority for a vertical."""
    suggestions = get_suggestions_for_vertical(vertical)
    if suggestions is None:
        return []
    return [item for item in suggestions.all_items() if item.priority == priority]


def get_essential_suggestions(vertical: str) -> list[SuggestedKBItem]:
    return get_suggestions_by_priority(vertical, "essential")


def count_suggestions(vertical: str) -> dict[str, int]:
    """Count suggested items by type and priority."""
    suggestions = get_suggestions_for_vertical(vertical)
    if suggestions is None:
        return {
            "total": 0,
            "instructions": 0,
            "policies": 0,
            "articles": 0,
            "templates": 0,
            "essential": 0,
            "recommended": 0,
            "optional": 0,
        }

    items = suggestions.all_items()
    return {
        "total": len(items),
        "instructions": len(suggestions.instructions),
        "policies": len(suggestions.policies),
        "articles": len(suggestions.articles),
        "templates": len(suggestions.templates),
        "essential": sum(1 for i in items if i.priority == "essential"),
        "recommended": sum(1 for i in items if i.priority == "recommended"),
        "optional": sum(1 for i in items if i.priority == "optional"),
    }
