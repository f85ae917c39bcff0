"""Streamlit demo UI for task-engine."""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Any, Optional

from task_engine.adapters import csv_adapter, json_adapter
from task_engine.classifier import apply_overrides, classify_task
from task_engine.evaluator import evaluate, run_self_check
from task_engine.schema import TaskCategory, TaskPriority

AUTO = "(auto)"


def _parse_examples_from_path(file_path: str) -> list:
    suffix = Path(file_path).suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(file_path)
    if suffix == ".json":
        return json_adapter.parse(file_path)
    raise ValueError("Unsupported file type. Please use .csv or .json")


def _parse_uploaded(uploaded_file) -> list:
    suffix = Path(uploaded_file.name).suffix.lower()
    with tempfile.NamedTemporaryFile(delete=False, suffix=suffix) as handle:
        handle.write(uploaded_file.getbuffer())
        temp_path = handle.name
    try:
        return _parse_examples_from_path(temp_path)
    finally:
        Path(temp_path).unlink(missing_ok=True)


def preview(title: str, description: str, category: Optional[str], priority: Optional[str]) -> dict[str, Any]:
    """Classify form input and merge manual overrides for display."""

    classified = classify_task(title, description)
    final = apply_overrides(classified, category=category, priority=priority)
    return {
        "classified": classified.to_dict(),
        "final": final.to_dict(),
        "overridden": final.category != classified.category or final.priority != classified.priority,
    }


def main() -> None:
    import streamlit as st

    st.set_page_config(page_title="Task Engine Demo", layout="wide")
    st.title("Task Engine: Classification Preview")

    with st.sidebar:
        st.header("Overrides")
        category = st.selectbox("Category", options=[AUTO] + [c.value for c in TaskCategory], index=0)
        priority = st.selectbox("Priority", options=[AUTO] + [p.value for p in TaskPriority], index=0)
        st.header("Evaluation")
        uploaded = st.file_uploader("Upload labeled examples", type=["csv", "json"])

    title = st.text_input("Title", value="Schedule meeting with team")
    description = st.text_area("Description", value="Discuss project updates next Monday with John Smith")

    result = preview(
        title,
        description,
        None if category == AUTO else category,
        None if priority == AUTO else priority,
    )
    final = result["final"]

    st.subheader("A) Classification")
    c1, c2 = st.columns(2)
    c1.metric("Category", final["category"])
    c2.metric("Priority", final["priority"])
    if result["overridden"]:
        st.caption(
            f"Auto-detected {result['classified']['category']}/{result['classified']['priority']}, overridden manually."
        )

    st.subheader("B) Extracted Entities")
    st.table([{key: ", ".join(values) for key, values in final["extracted_entities"].items()}])

    st.subheader("C) Suggested Actions")
    for action in final["suggested_actions"]:
        st.write(f"- {action}")

    st.subheader("D) Self-check")
    check = run_self_check()
    st.write(f"{check['passed']} passed, {check['failed']} failed")
    st.text("\n".join(check["results"]))

    if uploaded is not None:
        st.subheader("E) Evaluation")
        try:
            report = evaluate(_parse_uploaded(uploaded))
        except ValueError as exc:
            st.error(f"Input error: {exc}")
            return
        e1, e2 = st.columns(2)
        e1.metric("Category accuracy", f"{report['category']['accuracy']:.2%}")
        e2.metric("Priority accuracy", f"{report['priority']['accuracy']:.2%}")
        if report["failures"]:
            st.table(report["failures"])


if __name__ == "__main__":
    main()
