"""First-match priority classification."""

from __future__ import annotations

from task_engine.schema import TaskPriority

# Checked in declaration order; low has no keywords.
PRIORITY_KEYWORDS: dict[TaskPriority, tuple[str, ...]] = {
    TaskPriority.HIGH: (
        "urgent", "asap", "immediately", "today", "critical",
        "emergency", "now", "priority", "important",
    ),
    TaskPriority.MEDIUM: ("soon", "this week", "important", "needed", "should"),
}


def classify_priority(text: str) -> TaskPriority:
    """Return high, then medium, on the first keyword hit; low otherwise."""

    lower_text = text.lower()
    for priority, keywords in PRIORITY_KEYWORDS.items():
        if any(keyword in lower_text for keyword in keywords):
            return priority
    return TaskPriority.LOW
