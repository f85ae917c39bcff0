"""Core data schema for task classification."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class TaskCategory(str, Enum):
    """Functional domain a task belongs to."""

    SCHEDULING = "scheduling"
    FINANCE = "finance"
    TECHNICAL = "technical"
    SAFETY = "safety"
    GENERAL = "general"


class TaskPriority(str, Enum):
    """Urgency tier of a task."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class ExtractedEntities:
    """Mentions pulled out of task text, deduplicated in first-seen order."""

    dates: tuple[str, ...] = ()
    people: tuple[str, ...] = ()
    locations: tuple[str, ...] = ()
    action_verbs: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "dates": list(self.dates),
            "people": list(self.people),
            "locations": list(self.locations),
            "actionVerbs": list(self.action_verbs),
        }


@dataclass(frozen=True)
class ClassificationResult:
    """Output of a single classification call."""

    category: TaskCategory
    priority: TaskPriority
    extracted_entities: ExtractedEntities = field(default_factory=ExtractedEntities)
    suggested_actions: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "category": self.category.value,
            "priority": self.priority.value,
            "extracted_entities": self.extracted_entities.to_dict(),
            "suggested_actions": list(self.suggested_actions),
        }
