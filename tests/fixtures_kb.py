"""Snapshot builders shared by the KB scoring tests."""

_FILLER = " We keep every guest informed about each step of their visit."


def long_text(base: str, length: int) -> str:
    """Pad `base` with neutral sentences until it reaches `length` characters."""
    text = base
    while len(text) < length:
        text += _FILLER
    return text


def build_complete_kb() -> dict:
    """Snapshot that fully satisfies every catalog field for any vertical."""
    return {
        "instructions": [
            {
                "id": "i1",
                "instruction_type": "identity",
                "instruction": long_text(
                    "Your name is Sofia. Your personality is warm and patient, "
                    "and your tone stays professional.",
                    220,
                ),
                "is_active": True,
            },
            {
                "id": "i2",
                "instruction_type": "communication_style",
                "instruction": long_text("Answer in short sentences and offer a next step.", 110),
                "is_active": True,
            },
            {
                "id": "i3",
                "instruction_type": "upselling",
                "instruction": long_text("Mention whitening after every cleaning booking.", 110),
                "is_active": True,
            },
        ],
        "policies": [
            {
                "id": "p1",
                "policy_type": "cancellation",
                "policy_text": long_text(
                    "To cancel an appointment please give 24 hours advance notice.", 160
                ),
                "is_active": True,
            },
            {
                "id": "p2",
                "policy_type": "payment",
                "policy_text": long_text(
                    "Accepted payment method: cash, debit card or credit card.", 160
                ),
                "is_active": True,
            },
            {
                "id": "p3",
                "policy_type": "pricing",
                "policy_text": long_text("Prices are quoted after the first consultation.", 160),
                "is_active": True,
            },
            {
                "id": "p4",
                "policy_type": "warranty",
                "policy_text": long_text("Fillings are covered for one year.", 160),
                "is_active": True,
            },
        ],
        "articles": [
            {
                "id": "a1",
                "category": "about_us",
                "content": long_text("Sonrisa Dental opened its doors downtown in 2010.", 320),
                "is_active": True,
            },
            {
                "id": "a2",
                "category": "differentiators",
                "content": long_text("Digital x-rays give results during the first visit.", 320),
                "is_active": True,
            },
        ],
        "templates": [
            {
                "id": "t1",
                "trigger_type": "greeting",
                "template_text": long_text("Hello! Thanks for writing to Sonrisa Dental.", 110),
                "is_active": True,
            },
            {
                "id": "t2",
                "trigger_type": "farewell",
                "template_text": long_text("Thanks for writing, see you soon!", 60),
                "is_active": True,
            },
            {
                "id": "t3",
                "trigger_type": "after_hours",
                "template_text": "We are closed now; we open again at 9 am.",
                "is_active": True,
            },
        ],
        "competitors": [
            {
                "id": "c1",
                "competitor_name": "Other Clinic",
                "response_strategy": "Focus on our certified specialists.",
                "is_active": True,
            },
        ],
        "services": [
            {"id": f"s{i}", "name": f"Service {i}", "is_active": True} for i in range(1, 7)
        ],
        "branches": [
            {
                "id": "b1",
                "name": "Downtown",
                "operating_hours": {"mon": "09:00-18:00", "sat": "09:00-14:00"},
                "is_active": True,
            },
        ],
        "staff": [
            {"id": "st1", "first_name": "Ana", "last_name": "Ruiz", "role": "dentist", "is_active": True},
        ],
    }

