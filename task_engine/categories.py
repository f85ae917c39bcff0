"""Keyword-scored category classification."""

from __future__ import annotations

from task_engine.schema import TaskCategory

# Declaration order is the tie-break order.
CATEGORY_KEYWORDS: dict[TaskCategory, tuple[str, ...]] = {
    TaskCategory.SCHEDULING: (
        "meeting", "schedule", "call", "appointment", "deadline",
        "calendar", "event", "reminder", "agenda",
    ),
    TaskCategory.FINANCE: (
        "payment", "invoice", "bill", "budget", "cost",
        "expense", "money", "price", "financial", "revenue",
    ),
    TaskCategory.TECHNICAL: (
        "bug", "fix", "error", "install", "repair", "maintain",
        "update", "deploy", "code", "system", "server",
    ),
    TaskCategory.SAFETY: (
        "safety", "hazard", "inspection", "compliance", "ppe",
        "risk", "emergency", "warning", "secure",
    ),
}


def category_scores(text: str) -> dict[TaskCategory, int]:
    """Count distinct keywords of each category found anywhere in the text."""

    lower_text = text.lower()
    return {
        category: sum(1 for keyword in keywords if keyword in lower_text)
        for category, keywords in CATEGORY_KEYWORDS.items()
    }


def classify_category(text: str) -> TaskCategory:
    """Return the highest scoring category, earliest declared wins a tie."""

    best_category = TaskCategory.GENERAL
    max_score = 0
    for category, score in category_scores(text).items():
        if score > max_score:
            max_score = score
            best_category = category
    return best_category
