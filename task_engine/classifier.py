"""Rule-based task classification entry point."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from task_engine.actions import suggested_actions
from task_engine.categories import classify_category
from task_engine.entities import extract_entities
from task_engine.priority import classify_priority
from task_engine.schema import ClassificationResult, TaskCategory, TaskPriority

logger = logging.getLogger(__name__)


def classify_task(title: Optional[str], description: Optional[str] = "") -> ClassificationResult:
    """Derive category, priority, entities and suggested actions from task text.

    Title and description are joined with a single space. Category and
    priority match against a lowercased copy; entity extraction sees the
    original casing. Never raises for string or missing input.
    """

    full_text = f"{title or ''} {description or ''}"

    category = classify_category(full_text)
    priority = classify_priority(full_text)
    entities = extract_entities(full_text)

    logger.debug(
        "Classified %r as %s/%s (%d dates, %d people, %d locations, %d verbs)",
        full_text[:60],
        category.value,
        priority.value,
        len(entities.dates),
        len(entities.people),
        len(entities.locations),
        len(entities.action_verbs),
    )

    return ClassificationResult(
        category=category,
        priority=priority,
        extracted_entities=entities,
        suggested_actions=suggested_actions(category),
    )


def apply_overrides(
    result: ClassificationResult,
    category: TaskCategory | str | None = None,
    priority: TaskPriority | str | None = None,
) -> ClassificationResult:
    """Return a new result with user-chosen category and/or priority.

    Empty overrides keep the classified value. Suggested actions follow the
    final category.
    """

    final_category = TaskCategory(category) if category else result.category
    final_priority = TaskPriority(priority) if priority else result.priority
    return replace(
        result,
        category=final_category,
        priority=final_priority,
        suggested_actions=suggested_actions(final_category),
    )
