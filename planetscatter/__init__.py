"""planetscatter – procedural decoration placement on a miniature sphere planet.

This package contains the placement core and the thin layers around it:
- noise (core.noise) – the hash noise used as mask and jitter source
- project / orientation_from_normal (core.sphere) – lat/lon → surface transform
- ExclusionZone (core.exclusion) – circular keep-out regions in lat/lon space
- StreakScatterer, ClusterScatterer, FixedPlacer (scatter) – placement layers
- JSON / NPZ / PLY instance writers (core.exporter)
- scatter_from_config / build_planet (sdk) – config-driven runs

Rendering is left to the consumer of the placement transforms.
"""

from .errors import InvalidConfiguration, PlanetScatterError
from .core.noise import noise
from .core.sphere import SurfacePoint, orientation_from_normal, project
from .core.exclusion import ExclusionZone, SurfaceCoordinate
from .core.placement import InstanceBatch, PlacementTransform
from .core.exporter import JsonWriter, NpzWriter, PlyWriter
from .scatter import (
    ClusterConfig, ClusterScatterer,
    FixedPlacementConfig, FixedPlacer,
    StreakConfig, StreakScatterer,
)
