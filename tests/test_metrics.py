from datetime import datetime

from task_engine.metrics import compute_metrics
from task_engine.tasks import seed_tasks, update_task


def test_compute_metrics_empty():
    metrics = compute_metrics([])
    assert metrics["total_tasks"] == 0
    assert metrics["completion_rate"] == 0.0
    assert metrics["by_category"]["general"] == 0
    assert set(metrics["by_status"]) == {"pending", "in_progress", "completed"}


def test_compute_metrics_counts():
    now = datetime.fromisoformat("2025-01-06T09:00:00")
    tasks = seed_tasks(now=now)
    tasks[0] = update_task(tasks[0], now=now, status="completed")
    metrics = compute_metrics(tasks)

    assert metrics["total_tasks"] == 5
    assert metrics["by_category"] == {
        "scheduling": 1,
        "finance": 1,
        "technical": 2,
        "safety": 1,
        "general": 0,
    }
    assert metrics["by_priority"] == {"high": 2, "medium": 1, "low": 2}
    assert metrics["by_status"]["completed"] == 1
    assert round(metrics["completion_rate"], 2) == 0.2
