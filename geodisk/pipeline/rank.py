"""Closest/farthest selection over loaded records."""

from __future__ import annotations

from typing import Iterable

from geodisk.common.constants import RANK_LIMIT
from geodisk.common.models import GeoRecord, RankedRecords


def sort_by_distance(records: Iterable[GeoRecord]) -> list[GeoRecord]:
    # equal distances fall back to id so output order does not depend on input order
    return sorted(records, key=lambda record: (record.distance, record.id))


def rank(records: Iterable[GeoRecord], limit: int = RANK_LIMIT) -> RankedRecords:
    """Split records into the ``limit`` closest and ``limit`` farthest.

    Both lists are in ascending distance order. When there are no more than
    ``limit`` records, both lists hold every record.
    """
    if limit < 1:
        raise ValueError(f"limit must be positive, got {limit}")

    ordered = sort_by_distance(records)
    if len(ordered) <= limit:
        return RankedRecords(closest=list(ordered), farthest=list(ordered), total=len(ordered))
    return RankedRecords(closest=ordered[:limit], farthest=ordered[-limit:], total=len(ordered))
