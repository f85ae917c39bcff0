"""Category-keyed suggested next steps."""

from __future__ import annotations

from task_engine.schema import TaskCategory

SUGGESTED_ACTIONS: dict[TaskCategory, tuple[str, ...]] = {
    TaskCategory.SCHEDULING: ("Block calendar", "Send invite", "Prepare agenda", "Set reminder"),
    TaskCategory.FINANCE: ("Check budget", "Get approval", "Generate invoice", "Update records"),
    TaskCategory.TECHNICAL: ("Diagnose issue", "Check resources", "Assign technician", "Document fix"),
    TaskCategory.SAFETY: ("Conduct inspection", "File report", "Notify supervisor", "Update checklist"),
    TaskCategory.GENERAL: ("Review requirements", "Assign team member", "Set deadline", "Create subtasks"),
}


def suggested_actions(category: TaskCategory | str | None) -> tuple[str, ...]:
    """Return the checklist for a category, falling back to general."""

    try:
        key = TaskCategory(category)
    except ValueError:
        key = TaskCategory.GENERAL
    return SUGGESTED_ACTIONS[key]
