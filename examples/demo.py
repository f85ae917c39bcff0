"""Demo script for task-engine."""

import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from task_engine.adapters.csv_adapter import default_export_name, export_tasks, parse
from task_engine.evaluator import evaluate, run_self_check
from task_engine.metrics import compute_metrics
from task_engine.tasks import seed_tasks


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    tasks = seed_tasks()
    for task in tasks:
        print(f"[{task.category.value}/{task.priority.value}] {task.title}")
        print("   entities:", json.dumps(task.extracted_entities.to_dict()))
        print("   next steps:", ", ".join(task.suggested_actions))

    print("Metrics:", compute_metrics(tasks))

    check = run_self_check()
    print(f"Self-check: {check['passed']} passed, {check['failed']} failed")
    for line in check["results"]:
        print("  ", line)

    report = evaluate(parse("examples/sample_labeled.csv"))
    print("Category accuracy:", report["category"]["accuracy"])
    print("Priority accuracy:", report["priority"]["accuracy"])

    out_path = Path("outputs") / default_export_name()
    out_path.parent.mkdir(parents=True, exist_ok=True)
    export_tasks(tasks, str(out_path))
    print(f"Exported tasks to {out_path}")


if __name__ == "__main__":
    main()
