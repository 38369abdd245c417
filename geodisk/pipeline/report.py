"""Plain-text rendering and run summary output."""

from __future__ import annotations

from pathlib import Path

from geodisk.common.constants import RANK_LIMIT
from geodisk.common.fs import write_json
from geodisk.common.models import GeoRecord, RankedRecords, ReferencePoint


def format_record(record: GeoRecord) -> str:
    return f"LocationID: {record.id} ({record.distance:.6f} kilometers)"


def render_report(ranked: RankedRecords, reference_name: str, limit: int = RANK_LIMIT) -> str:
    lines = [f"Top {limit} Locations closest to {reference_name}:"]
    lines.extend(f"\t{format_record(record)}" for record in ranked.closest)
    lines.append("")
    lines.append(f"Top {limit} Locations farthest to {reference_name}:")
    lines.extend(f"\t{format_record(record)}" for record in ranked.farthest)
    lines.append("")
    return "\n".join(lines) + "\n"


def write_run_summary(path: Path, run_id: str, reference: ReferencePoint, ranked: RankedRecords) -> Path:
    payload = {
        "run_id": run_id,
        "reference": reference.to_dict(),
        "total": ranked.total,
        "closest": [record.to_dict() for record in ranked.closest],
        "farthest": [record.to_dict() for record in ranked.farthest],
    }
    write_json(path, payload)
    return path
