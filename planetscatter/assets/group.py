from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import numpy as np

from ..core.placement import PlacementTransform
from ..core.sphere import IDENTITY, Quat, quaternion_multiply, quaternion_to_matrix
from .loader import DecorationAsset


@dataclass(frozen=True)
class Instance:
    layer: str
    transform: PlacementTransform
    asset: Optional[DecorationAsset] = None


@dataclass
class PlanetGroup:
    """Rotatable parent of every decoration instance on the planet."""

    radius: float
    orientation: Quat = IDENTITY
    instances: List[Instance] = field(default_factory=list)

    def add_layer(
        self,
        layer: str,
        transforms: Sequence[PlacementTransform],
        asset: Optional[DecorationAsset] = None,
    ) -> None:
        self.instances.extend(Instance(layer, t, asset) for t in transforms)

    def layer(self, name: str) -> List[Instance]:
        return [inst for inst in self.instances if inst.layer == name]

    def rotate(self, delta: Quat) -> None:
        """Pre-multiply a world-space rotation onto the group orientation."""
        q = np.asarray(quaternion_multiply(delta, self.orientation), dtype=np.float64)
        q = q / np.linalg.norm(q)
        self.orientation = (float(q[0]), float(q[1]), float(q[2]), float(q[3]))

    def world_matrix(self, instance: Instance) -> np.ndarray:
        group = np.eye(4, dtype=np.float64)
        group[:3, :3] = quaternion_to_matrix(self.orientation)
        return group @ instance.transform.matrix()
