"""Evaluate classifier accuracy on a labeled CSV/JSON dataset."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from task_engine.adapters import csv_adapter, json_adapter
from task_engine.evaluator import evaluate

logger = logging.getLogger("run_evaluation")


def _load_examples(path: Path):
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(str(path))
    if suffix == ".json":
        return json_adapter.parse(str(path))
    raise ValueError("Unsupported input format, expected .csv or .json")


def main() -> None:
    parser = argparse.ArgumentParser(description="Evaluate task-engine classification accuracy")
    parser.add_argument("--data", required=True, help="Path to labeled CSV/JSON examples")
    parser.add_argument("--output", default="outputs", help="Directory for the JSON report")
    parser.add_argument("--verbose", action="store_true", help="Log every classification")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    data_path = Path(args.data)
    examples = _load_examples(data_path)
    logger.info("Loaded %d labeled examples from %s", len(examples), data_path)
    report = evaluate(examples)

    print(json.dumps(report, indent=2, ensure_ascii=False))

    outputs_dir = Path(args.output)
    outputs_dir.mkdir(parents=True, exist_ok=True)
    out_path = outputs_dir / "evaluation_report.json"
    out_path.write_text(json.dumps(report, indent=2, ensure_ascii=False), encoding="utf-8")
    logger.info("Saved evaluation report to %s", out_path)


if __name__ == "__main__":
    main()
