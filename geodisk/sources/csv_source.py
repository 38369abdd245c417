"""CSV-backed record source."""

from __future__ import annotations

import logging
import os

from geodisk.common.models import GeoRecord, ReferencePoint
from geodisk.pipeline.loader import Source, compute_distances
from geodisk.sources.base import RecordSource


class CsvRecordSource(RecordSource):
    name = "csv"

    def __init__(self, source: Source, logger: logging.Logger | None = None):
        self.source = source
        self.logger = logger

    def __repr__(self) -> str:
        target = os.fspath(self.source) if isinstance(self.source, (str, os.PathLike)) else "<stream>"
        return f"CsvRecordSource({target!r})"

    def load(self, reference: ReferencePoint) -> list[GeoRecord]:
        coordinate = reference.coordinate
        return compute_distances(self.source, coordinate.latitude, coordinate.longitude, logger=self.logger)
