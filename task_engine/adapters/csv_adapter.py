"""CSV adapter for labeled examples and task export."""

from __future__ import annotations

import csv
import logging
from datetime import datetime
from typing import Optional

from task_engine.evaluator import LabeledExample
from task_engine.schema import TaskCategory, TaskPriority
from task_engine.tasks import Task

logger = logging.getLogger(__name__)

EXPORT_HEADERS = [
    "ID",
    "Title",
    "Description",
    "Category",
    "Priority",
    "Status",
    "Assigned To",
    "Due Date",
    "Created At",
    "Updated At",
]


def _parse_label(enum_cls, raw: Optional[str], field: str, row_number: int):
    value = (raw or "").strip().lower()
    if not value:
        return None
    try:
        return enum_cls(value)
    except ValueError as exc:
        raise ValueError(f"Row {row_number}: invalid {field} '{value}'") from exc


def _parse_row(row: dict, row_number: int) -> LabeledExample:
    title = (row.get("title") or "").strip()
    if not title:
        raise ValueError(f"Row {row_number}: missing required field 'title'")

    category = _parse_label(TaskCategory, row.get("category"), "category", row_number)
    priority = _parse_label(TaskPriority, row.get("priority"), "priority", row_number)
    if category is None and priority is None:
        raise ValueError(f"Row {row_number}: needs a category or priority label")

    return LabeledExample(
        title=title,
        description=(row.get("description") or "").strip(),
        category=category,
        priority=priority,
        name=(row.get("name") or "").strip() or None,
    )


def parse(file_path: str) -> list[LabeledExample]:
    """Parse CSV file into a list of labeled examples."""

    with open(file_path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            return []

        examples: list[LabeledExample] = []
        for row_number, row in enumerate(reader, start=2):
            examples.append(_parse_row(row, row_number))
        logger.debug("Parsed %d labeled examples from %s", len(examples), file_path)
        return examples


def _task_row(task: Task) -> list[str]:
    return [
        task.id,
        task.title,
        task.description,
        task.category.value,
        task.priority.value,
        task.status.value,
        task.assigned_to or "",
        task.due_date.strftime("%Y-%m-%d") if task.due_date else "",
        task.created_at.strftime("%Y-%m-%d %H:%M:%S"),
        task.updated_at.strftime("%Y-%m-%d %H:%M:%S"),
    ]


def export_tasks(tasks: list[Task], file_path: str) -> None:
    """Write tasks to CSV, one row per task."""

    with open(file_path, "w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle)
        writer.writerow(EXPORT_HEADERS)
        writer.writerows(_task_row(task) for task in tasks)
    logger.debug("Exported %d tasks to %s", len(tasks), file_path)


def default_export_name(now: Optional[datetime] = None) -> str:
    return f"tasks-export-{(now or datetime.now()).strftime('%Y-%m-%d')}.csv"
