"""Record source interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from geodisk.common.models import GeoRecord, ReferencePoint


class RecordSource(ABC):
    """Produces the ordered records of one invocation, with distances to ``reference``."""

    name = "source"

    @abstractmethod
    def load(self, reference: ReferencePoint) -> list[GeoRecord]:
        ...
