"""Audit trail and application logging for puzzle runs."""

import csv
import json
import logging
import os
from pathlib import Path

from puzzles.utils import iso_now

DEFAULT_LOG_DIR = Path(__file__).resolve().parent.parent / "logs"

CSV_HEADERS = [
    "timestamp",
    "run_id",
    "puzzle",
    "part",
    "answer",
    "input_path",
    "input_hash",
    "input_char_count",
    "details",
]


def log_dir() -> Path:
    """Directory for app.log, audit.log and results files (CAMPSITE_LOG_DIR overrides)."""
    override = os.environ.get("CAMPSITE_LOG_DIR")
    return Path(override) if override else DEFAULT_LOG_DIR


def _ensure_log_dir() -> Path:
    d = log_dir()
    d.mkdir(parents=True, exist_ok=True)
    return d


def log_puzzle_result(
    *,
    run_id: str,
    result: dict,
    input_path: str,
    input_char_count: int,
):
    """
    Record a solved puzzle for later review.
    Appends to puzzle_results.jsonl and puzzle_results.csv.
    """
    d = _ensure_log_dir()
    ts = iso_now()
    details = {
        k: v for k, v in result.items() if k not in ("puzzle", "part", "answer", "input_hash")
    }

    entry = {
        "timestamp": ts,
        "run_id": run_id,
        "puzzle": result["puzzle"],
        "part": result["part"],
        "answer": result["answer"],
        "input_path": input_path,
        "input_hash": result["input_hash"],
        "input_char_count": input_char_count,
        "details": details,
    }

    # JSONL for easy appending
    with open(d / "puzzle_results.jsonl", "a", encoding="utf-8") as f:
        f.write(json.dumps(entry, default=str) + "\n")

    csv_path = d / "puzzle_results.csv"
    csv_exists = csv_path.exists()
    with open(csv_path, "a", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=CSV_HEADERS)
        if not csv_exists:
            writer.writeheader()
        writer.writerow({**entry, "details": json.dumps(details, default=str)})


def audit_log(
    action: str,
    status: str,
    *,
    run_id: str | None = None,
    input_path: str | None = None,
    answer: int | None = None,
    error: str | None = None,
    extra: dict | None = None,
):
    """Append a structured audit entry to the audit log (JSONL)."""
    d = _ensure_log_dir()
    entry = {
        "timestamp": iso_now(),
        "action": action,
        "status": status,
    }
    if run_id:
        entry["run_id"] = run_id
    if input_path:
        entry["input_path"] = input_path
    if answer is not None:
        entry["answer"] = answer
    if error:
        entry["error"] = error
    if extra:
        entry.update(extra)

    with open(d / "audit.log", "a", encoding="utf-8") as f:
        f.write(json.dumps(entry, default=str) + "\n")


def setup_app_logging():
    """Configure application logging to console and file."""
    d = _ensure_log_dir()
    logger = logging.getLogger("campsite")
    if logger.handlers:
        return logger
    logger.setLevel(logging.DEBUG)

    fmt = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"

    # Console
    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO)
    ch.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    logger.addHandler(ch)

    # File
    fh = logging.FileHandler(d / "app.log", encoding="utf-8")
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    logger.addHandler(fh)

    return logger
