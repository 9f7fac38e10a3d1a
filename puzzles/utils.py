"""Utilities for hashing and run metadata."""

import hashlib
import uuid
from datetime import datetime, timezone


def hash_text(text: str) -> str:
    """Compute SHA256 hash of text. Deterministic."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def iso_now() -> str:
    """Current UTC timestamp as ISO string."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"


def new_run_id() -> str:
    return str(uuid.uuid4())[:8]
