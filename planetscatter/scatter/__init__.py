from .base import Scatterer
from .cluster import ClusterConfig, ClusterScatterer
from .fixed import FixedPlacementConfig, FixedPlacer
from .streak import StreakCandidate, StreakConfig, StreakScatterer

__all__ = [
    "Scatterer",
    "ClusterConfig",
    "ClusterScatterer",
    "FixedPlacementConfig",
    "FixedPlacer",
    "StreakCandidate",
    "StreakConfig",
    "StreakScatterer",
]
