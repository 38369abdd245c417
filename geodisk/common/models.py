"""Data models used across the pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from geodisk.common.constants import DEFAULT_REFERENCE_LAT, DEFAULT_REFERENCE_LNG, DEFAULT_REFERENCE_NAME
from geodisk.common.geometry import to_degrees, to_radians


@dataclass(frozen=True)
class Coordinate:
    """A latitude/longitude pair in radians."""

    latitude: float
    longitude: float

    @classmethod
    def from_degrees(cls, latitude: float, longitude: float) -> Coordinate:
        return cls(latitude=to_radians(latitude), longitude=to_radians(longitude))


@dataclass(frozen=True)
class ReferencePoint:
    name: str
    latitude_degrees: float
    longitude_degrees: float
    coordinate: Coordinate = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "coordinate",
            Coordinate.from_degrees(self.latitude_degrees, self.longitude_degrees),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "lat": self.latitude_degrees, "lng": self.longitude_degrees}


DEFAULT_REFERENCE = ReferencePoint(
    name=DEFAULT_REFERENCE_NAME,
    latitude_degrees=DEFAULT_REFERENCE_LAT,
    longitude_degrees=DEFAULT_REFERENCE_LNG,
)


@dataclass(frozen=True)
class GeoRecord:
    """One parsed CSV row; coordinates in radians, distance in kilometers."""

    id: str
    latitude: float
    longitude: float
    distance: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "lat": to_degrees(self.latitude),
            "lng": to_degrees(self.longitude),
            "distance_km": self.distance,
        }


@dataclass(frozen=True)
class RankedRecords:
    closest: list[GeoRecord]
    farthest: list[GeoRecord]
    total: int
