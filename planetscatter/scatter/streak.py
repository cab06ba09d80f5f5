from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from ..core.exclusion import ExclusionZone, SurfaceCoordinate, excluded_by_any
from ..core.noise import noise
from ..core.placement import PlacementTransform, place_on_surface
from ..core.utils import get_logger
from ..errors import InvalidConfiguration
from .base import is_count, validate_common

_log = get_logger()

# Second streak sample is stretched along lon and squashed along lat.
_STREAK_LON_STRETCH = 1.3
_STREAK_LAT_SQUASH = 0.7
_STREAK_WEIGHTS = (0.6, 0.4)


@dataclass(frozen=True)
class StreakConfig:
    lat_segments: int = 20
    lon_segments: int = 35
    noise_scale: float = 2.5
    threshold: float = 0.25
    jitter: float = 0.15
    scale_min: float = 0.2
    scale_max: float = 0.4
    radius: float = 250.0
    exclusion_zones: Tuple[ExclusionZone, ...] = ()
    pole_mapping: str = "poles"

    @property
    def scale_range(self) -> float:
        return self.scale_max - self.scale_min


@dataclass(frozen=True)
class StreakCandidate:
    """Outcome of evaluating one grid cell."""

    i: int
    j: int
    coordinate: SurfaceCoordinate
    streak: float
    status: str  # "excluded", "masked", "jitter_excluded" or "placed"
    placement: Optional[PlacementTransform] = None


class StreakScatterer:
    """Noise-masked ground cover over a lat/lon grid.

    Each cell is kept when its two-sample streak value exceeds the threshold,
    then jittered and re-checked against the exclusion zones. Output is in
    row-major order (latitude index outer).
    """

    def __init__(self, config: StreakConfig) -> None:
        if not (is_count(config.lat_segments) and is_count(config.lon_segments)):
            raise InvalidConfiguration("lat_segments and lon_segments must be integers.")
        if config.lat_segments <= 0 or config.lon_segments <= 0:
            raise InvalidConfiguration("lat_segments and lon_segments must be positive.")
        if not (0.0 <= config.threshold <= 1.0):
            raise InvalidConfiguration("threshold must lie in [0, 1].")
        if config.jitter < 0.0:
            raise InvalidConfiguration("jitter must be non-negative.")
        for zone in config.exclusion_zones:
            if not isinstance(zone, ExclusionZone):
                raise InvalidConfiguration(f"Expected ExclusionZone, got {type(zone).__name__}.")
        validate_common(config.radius, config.scale_min, config.scale_max, config.pole_mapping)
        self.config = config

    def streak_value(self, lat: float, lon: float) -> float:
        s = self.config.noise_scale
        v1 = noise(lat * s, lon * s)
        v2 = noise(lon * s * _STREAK_LON_STRETCH, lat * s * _STREAK_LAT_SQUASH)
        return v1 * _STREAK_WEIGHTS[0] + v2 * _STREAK_WEIGHTS[1]

    def candidates(self) -> Iterator[StreakCandidate]:
        cfg = self.config
        zones = cfg.exclusion_zones
        for i in range(cfg.lat_segments):
            for j in range(cfg.lon_segments):
                lat = (i / cfg.lat_segments) * 2 - 1
                lon = (j / cfg.lon_segments) * 2 - 1
                coord = SurfaceCoordinate(lat, lon)

                if excluded_by_any(zones, coord):
                    yield StreakCandidate(i, j, coord, float("nan"), "excluded")
                    continue

                streak = self.streak_value(lat, lon)
                if not streak > cfg.threshold:
                    yield StreakCandidate(i, j, coord, streak, "masked")
                    continue

                jit_lat = lat + (noise(i * 3.7, j * 4.3) - 0.5) * cfg.jitter
                jit_lon = lon + (noise(i * 5.1, j * 6.7) - 0.5) * cfg.jitter
                jittered = SurfaceCoordinate(jit_lat, jit_lon)
                if excluded_by_any(zones, jittered):
                    yield StreakCandidate(i, j, jittered, streak, "jitter_excluded")
                    continue

                scale = cfg.scale_min + noise(i * 1.1, j * 1.3) * cfg.scale_range
                placement = place_on_surface(jit_lat, jit_lon, cfg.radius, scale, cfg.pole_mapping)
                yield StreakCandidate(i, j, jittered, streak, "placed", placement)

    def scatter(self) -> List[PlacementTransform]:
        counts = {"excluded": 0, "masked": 0, "jitter_excluded": 0, "placed": 0}
        out: List[PlacementTransform] = []
        for cand in self.candidates():
            counts[cand.status] += 1
            if cand.placement is not None:
                out.append(cand.placement)
        _log.debug(
            "Streak grid %dx%d: %d excluded, %d masked, %d excluded after jitter, %d placed",
            self.config.lat_segments,
            self.config.lon_segments,
            counts["excluded"],
            counts["masked"],
            counts["jitter_excluded"],
            counts["placed"],
        )
        return out
