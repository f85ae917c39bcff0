"""Due-date reminder selection."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

from task_engine.tasks import Task, TaskStatus


def due_for_reminder(
    tasks: list[Task],
    now: datetime,
    lead_hours: float = 24,
    window_hours: float = 1,
) -> list[Task]:
    """Return open tasks due within [now + lead, now + lead + window)."""

    start = now + timedelta(hours=lead_hours)
    end = start + timedelta(hours=window_hours)
    return [
        task
        for task in tasks
        if task.due_date is not None and task.status != TaskStatus.COMPLETED and start <= task.due_date < end
    ]


def reminder_recipient(task: Task, created_by: Optional[str] = None) -> Optional[str]:
    """Prefer the assignee, fall back to the creator."""

    return task.assigned_to or created_by or None
