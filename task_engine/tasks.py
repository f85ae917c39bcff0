"""Task records built on top of the classifier."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta
from enum import Enum
from typing import Iterable, Optional
from uuid import uuid4

from task_engine.actions import suggested_actions
from task_engine.classifier import apply_overrides, classify_task
from task_engine.schema import ExtractedEntities, TaskCategory, TaskPriority


class TaskStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


@dataclass(frozen=True)
class Task:
    """A classified task as handed to persistence and export layers."""

    id: str
    title: str
    description: str
    category: TaskCategory
    priority: TaskPriority
    status: TaskStatus
    created_at: datetime
    updated_at: datetime
    assigned_to: Optional[str] = None
    due_date: Optional[datetime] = None
    extracted_entities: ExtractedEntities = field(default_factory=ExtractedEntities)
    suggested_actions: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "category": self.category.value,
            "priority": self.priority.value,
            "status": self.status.value,
            "assigned_to": self.assigned_to,
            "due_date": self.due_date.isoformat() if self.due_date else None,
            "extracted_entities": self.extracted_entities.to_dict(),
            "suggested_actions": list(self.suggested_actions),
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }


def create_task(
    title: str,
    description: str = "",
    assigned_to: Optional[str] = None,
    due_date: Optional[datetime] = None,
    category: TaskCategory | str | None = None,
    priority: TaskPriority | str | None = None,
    now: Optional[datetime] = None,
) -> Task:
    """Classify the text and build a pending task, honouring user overrides."""

    result = apply_overrides(classify_task(title, description), category=category, priority=priority)
    timestamp = now or datetime.now()
    return Task(
        id=str(uuid4()),
        title=title,
        description=description,
        category=result.category,
        priority=result.priority,
        status=TaskStatus.PENDING,
        created_at=timestamp,
        updated_at=timestamp,
        assigned_to=assigned_to,
        due_date=due_date,
        extracted_entities=result.extracted_entities,
        suggested_actions=result.suggested_actions,
    )


def update_task(task: Task, now: Optional[datetime] = None, **changes) -> Task:
    """Return a copy of the task with changes applied and a fresh updated_at.

    A new title or description re-derives entities and suggested actions;
    category and priority are re-classified unless given in the changes.
    """

    for key in ("category", "priority"):
        if key in changes and not changes[key]:
            del changes[key]
    if "status" in changes:
        changes["status"] = TaskStatus(changes["status"])

    if "title" in changes or "description" in changes:
        result = apply_overrides(
            classify_task(changes.get("title", task.title), changes.get("description", task.description)),
            category=changes.get("category"),
            priority=changes.get("priority"),
        )
        changes["category"] = result.category
        changes["priority"] = result.priority
        changes["extracted_entities"] = result.extracted_entities
        changes["suggested_actions"] = result.suggested_actions
    elif "category" in changes:
        # Manual recategorization swaps the checklist too.
        changes["category"] = TaskCategory(changes["category"])
        changes["suggested_actions"] = suggested_actions(changes["category"])
    if "priority" in changes:
        changes["priority"] = TaskPriority(changes["priority"])

    return replace(task, updated_at=now or datetime.now(), **changes)


@dataclass(frozen=True)
class TaskHistory:
    """Audit entry for a task creation or change."""

    id: str
    task_id: str
    action: str
    changed_at: datetime
    old_value: Optional[dict] = None
    new_value: Optional[dict] = None
    changed_by: Optional[str] = None


def history_action(old: Optional[Task], new: Task) -> str:
    """Name the change: created, completed, status_changed or updated."""

    if old is None:
        return "created"
    if new.status != old.status:
        return "completed" if new.status == TaskStatus.COMPLETED else "status_changed"
    return "updated"


def history_entry(
    old: Optional[Task],
    new: Task,
    now: Optional[datetime] = None,
    changed_by: Optional[str] = None,
) -> TaskHistory:
    """Build the history entry for creating (old is None) or updating a task."""

    return TaskHistory(
        id=str(uuid4()),
        task_id=new.id,
        action=history_action(old, new),
        changed_at=now or datetime.now(),
        old_value=old.to_dict() if old is not None else None,
        new_value=new.to_dict(),
        changed_by=changed_by,
    )


def task_history(entries: Iterable[TaskHistory], task_id: str) -> list[TaskHistory]:
    """Entries for one task, newest first."""

    return sorted((e for e in entries if e.task_id == task_id), key=lambda e: e.changed_at, reverse=True)


def filter_tasks(
    tasks: Iterable[Task],
    status: TaskStatus | str | None = None,
    category: TaskCategory | str | None = None,
    priority: TaskPriority | str | None = None,
    search: Optional[str] = None,
) -> list[Task]:
    """Apply every given filter and sort newest first."""

    result = list(tasks)
    if status:
        result = [t for t in result if t.status == TaskStatus(status)]
    if category:
        result = [t for t in result if t.category == TaskCategory(category)]
    if priority:
        result = [t for t in result if t.priority == TaskPriority(priority)]
    if search:
        needle = search.lower()
        result = [t for t in result if needle in t.title.lower() or needle in t.description.lower()]

    return sorted(result, key=lambda t: t.created_at, reverse=True)


SAMPLE_TASKS = [
    {
        "title": "Schedule urgent meeting with team today about budget allocation",
        "description": "Need to discuss Q4 budget with the finance team. Contact John and Sarah for availability.",
        "assigned_to": "John Smith",
        "due_in_days": 0,
    },
    {
        "title": "Fix critical bug in payment system",
        "description": "Users are experiencing errors during checkout. Deploy hotfix immediately.",
        "assigned_to": "Alex Developer",
        "due_in_days": 1,
    },
    {
        "title": "Conduct safety inspection at Site B",
        "description": "Quarterly compliance check for PPE and hazard identification. File report by Friday.",
        "assigned_to": "Safety Officer",
        "due_in_days": 2,
    },
    {
        "title": "Review invoice from vendor",
        "description": "Check the expense report and approve payment for office supplies.",
        "assigned_to": "Finance Team",
        "due_in_days": 3,
    },
    {
        "title": "Update server configuration",
        "description": "Maintain system performance by updating configuration. Soon this needs to be done.",
        "assigned_to": "DevOps Team",
        "due_in_days": 5,
    },
]


def seed_tasks(now: Optional[datetime] = None) -> list[Task]:
    """Build the demo task list, due dates counted in days from now."""

    timestamp = now or datetime.now()
    return [
        create_task(
            sample["title"],
            sample["description"],
            assigned_to=sample["assigned_to"],
            due_date=timestamp + timedelta(days=sample["due_in_days"]),
            now=timestamp,
        )
        for sample in SAMPLE_TASKS
    ]
