from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from ..core.exclusion import SurfaceCoordinate
from ..core.noise import noise
from ..core.placement import PlacementTransform, place_on_surface
from ..core.utils import get_logger
from ..errors import InvalidConfiguration
from .base import is_count, validate_common

_log = get_logger()


@dataclass(frozen=True)
class ClusterConfig:
    clusters: Tuple[SurfaceCoordinate, ...]
    count: int = 25
    spread: float = 0.05
    scale_min: float = 0.8
    scale_max: float = 1.2
    radius: float = 250.0
    pole_mapping: str = "poles"

    @property
    def scale_range(self) -> float:
        return self.scale_max - self.scale_min


class ClusterScatterer:
    """Dense groups of ``count`` instances jittered around fixed centres.

    No masking and no exclusion: exactly ``len(clusters) * count`` transforms,
    clusters in list order, instances in index order.
    """

    def __init__(self, config: ClusterConfig) -> None:
        if not is_count(config.count) or config.count <= 0:
            raise InvalidConfiguration("count must be positive.")
        if config.spread < 0.0:
            raise InvalidConfiguration("spread must be non-negative.")
        for center in config.clusters:
            if not isinstance(center, SurfaceCoordinate):
                raise InvalidConfiguration(f"Expected SurfaceCoordinate, got {type(center).__name__}.")
        validate_common(config.radius, config.scale_min, config.scale_max, config.pole_mapping)
        self.config = config

    def scatter(self) -> List[PlacementTransform]:
        cfg = self.config
        out: List[PlacementTransform] = []
        for c, center in enumerate(cfg.clusters):
            for i in range(cfg.count):
                n_x = noise(i * 0.5 + c * 10, i * 0.7)
                n_y = noise(i * 0.3 + c * 15, i * 0.9)
                lat = center.lat + (n_x - 0.5) * cfg.spread
                lon = center.lon + (n_y - 0.5) * cfg.spread
                scale = cfg.scale_min + noise(i * 1.2 + c * 5, i * 1.5) * cfg.scale_range
                out.append(place_on_surface(lat, lon, cfg.radius, scale, cfg.pole_mapping))
        _log.debug("Cluster scatter: %d clusters x %d → %d placements", len(cfg.clusters), cfg.count, len(out))
        return out
