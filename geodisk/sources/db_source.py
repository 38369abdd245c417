"""Database-backed record source placeholder."""

from __future__ import annotations

from geodisk.common.config_loader import DatabaseConfig
from geodisk.common.errors import SourceUnavailableError
from geodisk.common.models import GeoRecord, ReferencePoint
from geodisk.sources.base import RecordSource

UNAVAILABLE_MESSAGE = "DB command not available yet."


class DatabaseRecordSource(RecordSource):
    """Reads locations from a mongo or sql store.

    Only the configuration is accepted today; ``load`` always raises
    ``SourceUnavailableError``.
    """

    name = "db"

    def __init__(self, config: DatabaseConfig | None = None):
        self.config = config

    def load(self, reference: ReferencePoint) -> list[GeoRecord]:
        raise SourceUnavailableError(UNAVAILABLE_MESSAGE)
