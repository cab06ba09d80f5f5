from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional

from ..errors import InvalidConfiguration


@dataclass(frozen=True)
class SurfaceCoordinate:
    """Normalized latitude/longitude, nominally in ``[-1, 1]``.

    Jitter may push either value slightly out of range; that is allowed.
    """

    lat: float
    lon: float


@dataclass(frozen=True)
class ExclusionZone:
    """Circular region in (lat, lon) space that placements must avoid.

    The distance is planar Euclidean in normalized units, not geodesic, so
    zones near the poles under-exclude along longitude.
    """

    lat: float
    lon: float
    radius: float
    name: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.radius >= 0.0:
            raise InvalidConfiguration(f"Exclusion radius must be >= 0, got {self.radius}.")

    @property
    def center(self) -> SurfaceCoordinate:
        return SurfaceCoordinate(self.lat, self.lon)

    def distance(self, coord: SurfaceCoordinate) -> float:
        return math.sqrt((coord.lat - self.lat) ** 2 + (coord.lon - self.lon) ** 2)

    def is_excluded(self, coord: SurfaceCoordinate) -> bool:
        return self.distance(coord) < self.radius


def excluded_by_any(zones: Iterable[ExclusionZone], coord: SurfaceCoordinate) -> bool:
    return any(zone.is_excluded(coord) for zone in zones)
