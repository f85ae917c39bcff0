from task_engine.priority import PRIORITY_KEYWORDS, classify_priority
from task_engine.schema import TaskPriority


def test_high_keywords():
    assert classify_priority("Urgent fix needed Critical bug in production") == TaskPriority.HIGH
    assert classify_priority("Call the plumber TODAY") == TaskPriority.HIGH


def test_high_beats_medium():
    assert classify_priority("This is important") == TaskPriority.HIGH
    assert classify_priority("Needed asap") == TaskPriority.HIGH


def test_medium_keywords():
    assert classify_priority("Finish this week") == TaskPriority.MEDIUM
    assert classify_priority("Groceries needed") == TaskPriority.MEDIUM


def test_low_is_fallback():
    assert classify_priority("") == TaskPriority.LOW
    assert classify_priority("Water the plants whenever") == TaskPriority.LOW


def test_substring_quirks_resolve_high():
    assert classify_priority("Clean desk, low priority") == TaskPriority.HIGH
    assert classify_priority("Let me know") == TaskPriority.HIGH


def test_keyword_table_order_sets_precedence():
    assert list(PRIORITY_KEYWORDS) == [TaskPriority.HIGH, TaskPriority.MEDIUM]
    assert "important" in PRIORITY_KEYWORDS[TaskPriority.HIGH]
    assert "important" in PRIORITY_KEYWORDS[TaskPriority.MEDIUM]
    assert classify_priority("important") == TaskPriority.HIGH
