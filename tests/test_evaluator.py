from task_engine.evaluator import BUILTIN_EXAMPLES, LabeledExample, compare, evaluate, run_self_check
from task_engine.schema import TaskCategory, TaskPriority


def test_self_check_passes():
    check = run_self_check()
    assert check["passed"] == len(BUILTIN_EXAMPLES)
    assert check["failed"] == 0
    assert all(line.startswith("✓") for line in check["results"])


def test_evaluate_empty():
    report = evaluate([])
    assert report["n_examples"] == 0
    assert report["failed"] == 0
    assert report["category"]["accuracy"] == 0.0
    assert report["priority"]["n"] == 0


def test_evaluate_reports_failures():
    examples = [
        LabeledExample("Fix server error", "", category=TaskCategory.TECHNICAL, priority=TaskPriority.LOW),
        LabeledExample("Water the plants", "", category=TaskCategory.FINANCE, name="mislabeled"),
    ]
    report = evaluate(examples)

    assert report["passed"] == 1
    assert report["failed"] == 1
    assert report["failures"][0]["name"] == "mislabeled"
    assert report["failures"][0]["mismatches"]["category"] == {"expected": "finance", "got": "general"}
    assert report["category"]["n"] == 2
    assert report["category"]["accuracy"] == 0.5
    assert report["priority"]["n"] == 1
    assert report["priority"]["accuracy"] == 1.0
    matrix = report["category"]["confusion_matrix"]
    assert len(matrix) == len(TaskCategory)
    assert sum(map(sum, matrix)) == 2


def test_compare_accuracy_delta():
    baseline = {"category": {"accuracy": 0.5}, "priority": {"accuracy": 0.8}}
    candidate = {"category": {"accuracy": 0.75}, "priority": {"accuracy": 0.8}}
    result = compare(baseline, candidate)
    assert round(result["category_accuracy_delta_pts"], 2) == 25.0
    assert round(result["priority_accuracy_delta_pts"], 2) == 0.0
