"""Schema validation for run reports."""

import json
from pathlib import Path

import jsonschema

SCHEMAS_DIR = Path(__file__).resolve().parent / "schemas"


def _load_schema(name: str) -> dict:
    path = SCHEMAS_DIR / f"{name}.schema.json"
    return json.loads(path.read_text(encoding="utf-8"))


def validate_run_report(data: dict) -> None:
    """Validate run report against schema. Raises jsonschema.ValidationError if invalid."""
    schema = _load_schema("run_report")
    jsonschema.validate(data, schema)
