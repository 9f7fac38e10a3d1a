"""Generate run_report.json for auditability."""

import json
from pathlib import Path

from puzzles.utils import iso_now
from puzzles.validation import validate_run_report


def build_run_report(run_id: str, input_path: str, result: dict) -> dict:
    """Run report dict from a solver result. Puzzle-specific fields go under `details`."""
    details = {
        k: v for k, v in result.items() if k not in ("puzzle", "part", "answer", "input_hash")
    }
    return {
        "run_id": run_id,
        "timestamp": iso_now(),
        "puzzle": result["puzzle"],
        "part": result["part"],
        "input_path": input_path,
        "input_hash": result["input_hash"],
        "answer": result["answer"],
        "details": details,
    }


def write_run_report(output_path: Path, run_id: str, input_path: str, result: dict) -> dict:
    """
    Write run_report.json with input hash, answer and puzzle details.
    Validated before writing; nothing is written if the report is invalid.
    """
    report = build_run_report(run_id, input_path, result)
    validate_run_report(report)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(report, indent=2), encoding="utf-8")
    return report
