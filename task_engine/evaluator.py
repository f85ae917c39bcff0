"""Classifier accuracy evaluation against labeled examples."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import numpy as np
from sklearn.metrics import accuracy_score, confusion_matrix, f1_score

from task_engine.classifier import classify_task
from task_engine.schema import TaskCategory, TaskPriority

logger = logging.getLogger(__name__)

_FIELDS = {
    "category": [category.value for category in TaskCategory],
    "priority": [priority.value for priority in TaskPriority],
}


@dataclass(frozen=True)
class LabeledExample:
    """Task text with the expected category and/or priority."""

    title: str
    description: str = ""
    category: Optional[TaskCategory] = None
    priority: Optional[TaskPriority] = None
    name: Optional[str] = None

    def expected(self, field: str) -> Optional[str]:
        value = getattr(self, field)
        return value.value if value is not None else None


BUILTIN_EXAMPLES = [
    LabeledExample(
        "Schedule meeting with team",
        "Discuss project updates",
        category=TaskCategory.SCHEDULING,
        name="Scheduling category detection",
    ),
    LabeledExample(
        "Review invoice",
        "Check the budget allocation for Q4",
        category=TaskCategory.FINANCE,
        name="Finance category detection",
    ),
    LabeledExample(
        "Urgent fix needed",
        "Critical bug in production",
        priority=TaskPriority.HIGH,
        name="High priority detection",
    ),
    LabeledExample(
        "Fix server error",
        "Deploy hotfix to production",
        category=TaskCategory.TECHNICAL,
        name="Technical category detection",
    ),
    LabeledExample(
        "Safety inspection required",
        "Check compliance with PPE regulations",
        category=TaskCategory.SAFETY,
        name="Safety category detection",
    ),
]


def _field_report(y_true: list[str], y_pred: list[str], labels: list[str]) -> dict[str, Any]:
    if not y_true:
        return {"n": 0, "accuracy": 0.0, "macro_f1": 0.0, "labels": labels, "confusion_matrix": []}

    y_true_arr = np.asarray(y_true)
    y_pred_arr = np.asarray(y_pred)
    present = [label for label in labels if label in set(y_true) | set(y_pred)]
    return {
        "n": int(len(y_true_arr)),
        "accuracy": float(accuracy_score(y_true_arr, y_pred_arr)),
        "macro_f1": float(f1_score(y_true_arr, y_pred_arr, labels=present, average="macro", zero_division=0)),
        "labels": labels,
        "confusion_matrix": confusion_matrix(y_true_arr, y_pred_arr, labels=labels).tolist(),
    }


def evaluate(examples: list[LabeledExample]) -> dict:
    """Classify every example and score each labeled field."""

    truth: dict[str, list[str]] = {field: [] for field in _FIELDS}
    predicted: dict[str, list[str]] = {field: [] for field in _FIELDS}
    failures: list[dict[str, Any]] = []
    passed = 0

    for index, example in enumerate(examples, start=1):
        result = classify_task(example.title, example.description)
        got = {"category": result.category.value, "priority": result.priority.value}

        mismatches = {}
        for field in _FIELDS:
            expected = example.expected(field)
            if expected is None:
                continue
            truth[field].append(expected)
            predicted[field].append(got[field])
            if got[field] != expected:
                mismatches[field] = {"expected": expected, "got": got[field]}

        if mismatches:
            failures.append({"index": index, "name": example.name or example.title, "mismatches": mismatches})
        else:
            passed += 1

    report = {
        "n_examples": len(examples),
        "passed": passed,
        "failed": len(failures),
        "failures": failures,
    }
    for field, labels in _FIELDS.items():
        report[field] = _field_report(truth[field], predicted[field], labels)

    logger.info("Evaluated %d examples: %d passed, %d failed", len(examples), passed, len(failures))
    return report


def run_self_check() -> dict:
    """Run the built-in examples and render one status line per example."""

    report = evaluate(BUILTIN_EXAMPLES)
    failed_by_index = {failure["index"]: failure for failure in report["failures"]}

    results = []
    for index, example in enumerate(BUILTIN_EXAMPLES, start=1):
        failure = failed_by_index.get(index)
        if failure is None:
            results.append(f"✓ {example.name}")
            continue
        detail = ", ".join(
            f"{field}: expected {m['expected']}, got {m['got']}" for field, m in failure["mismatches"].items()
        )
        results.append(f"✗ {example.name} - {detail}")

    return {"passed": report["passed"], "failed": report["failed"], "results": results}


def compare(baseline_report: dict, candidate_report: dict) -> dict:
    """Accuracy change per field, in percentage points."""

    return {
        f"{field}_accuracy_delta_pts": (
            candidate_report.get(field, {}).get("accuracy", 0.0) - baseline_report.get(field, {}).get("accuracy", 0.0)
        )
        * 100.0
        for field in _FIELDS
    }
