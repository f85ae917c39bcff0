"""Task list summary metrics."""

from __future__ import annotations

from collections import Counter

from task_engine.schema import TaskCategory, TaskPriority
from task_engine.tasks import Task, TaskStatus


def compute_metrics(tasks: list[Task]) -> dict:
    """Compute counts by status, category and priority plus completion rate."""

    by_status = Counter(task.status for task in tasks)
    by_category = Counter(task.category for task in tasks)
    by_priority = Counter(task.priority for task in tasks)

    total = len(tasks)
    completed = by_status[TaskStatus.COMPLETED]
    return {
        "total_tasks": total,
        "by_status": {status.value: by_status[status] for status in TaskStatus},
        "by_category": {category.value: by_category[category] for category in TaskCategory},
        "by_priority": {priority.value: by_priority[priority] for priority in TaskPriority},
        "completion_rate": completed / total if total else 0.0,
    }
