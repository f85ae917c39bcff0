from datetime import datetime, timedelta

from task_engine.escalation import due_for_reminder, reminder_recipient
from task_engine.tasks import create_task, update_task

NOW = datetime.fromisoformat("2025-01-06T09:00:00")


def _task(title, hours, **kwargs):
    return create_task(title, "", due_date=NOW + timedelta(hours=hours), now=NOW, **kwargs)


def test_due_for_reminder_window():
    inside = _task("inside", 24.5)
    early = _task("early", 23)
    edge = _task("edge", 25)
    done = update_task(_task("done", 24.2), now=NOW, status="completed")
    undated = create_task("undated", "", now=NOW)

    assert due_for_reminder([inside, early, edge, done, undated], NOW) == [inside]


def test_reminder_recipient():
    assert reminder_recipient(_task("a", 24, assigned_to="Ana")) == "Ana"
    assert reminder_recipient(_task("b", 24), created_by="owner-1") == "owner-1"
    assert reminder_recipient(_task("c", 24)) is None
