from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Tuple

import numpy as np

from ..core.placement import PlacementTransform, place_on_surface
from ..core.sphere import rotate_vector
from ..errors import InvalidConfiguration
from .base import validate_common


@dataclass(frozen=True)
class FixedPlacementConfig:
    lat: float
    lon: float
    scale: float = 1.0
    normal_offset: float = 0.0
    local_shift: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    radius: float = 250.0
    pole_mapping: str = "poles"


class FixedPlacer:
    """Single hand-placed object (pond, animal, building).

    The instance is pushed ``normal_offset`` along the surface normal (negative
    sinks it), then moved by ``local_shift`` expressed in its own rotated frame.
    """

    def __init__(self, config: FixedPlacementConfig) -> None:
        if not config.scale > 0.0:
            raise InvalidConfiguration("scale must be positive.")
        validate_common(config.radius, config.scale, config.scale, config.pole_mapping)
        self.config = config

    def scatter(self) -> List[PlacementTransform]:
        cfg = self.config
        base = place_on_surface(cfg.lat, cfg.lon, cfg.radius, cfg.scale, cfg.pole_mapping)
        pos = np.asarray(base.position) + np.asarray(base.normal) * cfg.normal_offset
        if any(cfg.local_shift):
            pos = pos + np.asarray(rotate_vector(base.orientation, cfg.local_shift))
        return [replace(base, position=(float(pos[0]), float(pos[1]), float(pos[2])))]
