"""JSON adapter for labeled examples and task export."""

from __future__ import annotations

import json
import logging

from task_engine.evaluator import LabeledExample
from task_engine.schema import TaskCategory, TaskPriority
from task_engine.tasks import Task

logger = logging.getLogger(__name__)


def _parse_item(item: dict, index: int) -> LabeledExample:
    if not isinstance(item, dict):
        raise ValueError(f"Item {index}: expected an object")

    title = str(item.get("title") or "").strip()
    if not title:
        raise ValueError(f"Item {index}: missing required field 'title'")

    labels = {}
    for field, enum_cls in (("category", TaskCategory), ("priority", TaskPriority)):
        raw = item.get(field)
        if raw in (None, ""):
            labels[field] = None
            continue
        try:
            labels[field] = enum_cls(str(raw).strip().lower())
        except ValueError as exc:
            raise ValueError(f"Item {index}: invalid {field} '{raw}'") from exc

    if labels["category"] is None and labels["priority"] is None:
        raise ValueError(f"Item {index}: needs a category or priority label")

    return LabeledExample(
        title=title,
        description=str(item.get("description") or "").strip(),
        category=labels["category"],
        priority=labels["priority"],
        name=item.get("name") or None,
    )


def parse(file_path: str) -> list[LabeledExample]:
    """Parse JSON file into labeled examples."""

    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    if not isinstance(payload, list):
        raise ValueError("JSON payload must be a list of objects")

    examples = [_parse_item(item, i) for i, item in enumerate(payload, start=1)]
    logger.debug("Parsed %d labeled examples from %s", len(examples), file_path)
    return examples


def export_tasks(tasks: list[Task], file_path: str) -> None:
    """Write tasks as a JSON list of task objects."""

    with open(file_path, "w", encoding="utf-8") as handle:
        json.dump([task.to_dict() for task in tasks], handle, indent=2, ensure_ascii=False)
    logger.debug("Exported %d tasks to %s", len(tasks), file_path)
