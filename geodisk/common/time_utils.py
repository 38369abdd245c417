"""UTC-focused helpers for run metadata."""

from __future__ import annotations

from datetime import datetime, timezone


def utc_timestamp_iso() -> str:
    return datetime.now(tz=timezone.utc).isoformat(timespec="milliseconds")


def generate_run_id() -> str:
    now = datetime.now(tz=timezone.utc)
    return now.strftime("geodisk-%Y%m%dT%H%M%S%fZ")
