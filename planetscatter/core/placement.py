from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from .exclusion import SurfaceCoordinate
from .sphere import Quat, Vec3, orientation_from_normal, project, quaternion_to_matrix


@dataclass(frozen=True)
class PlacementTransform:
    """Position, orientation and uniform scale of one decoration instance.

    ``orientation`` is a unit quaternion ``(x, y, z, w)`` rotating the
    canonical up axis onto ``normal``. ``coordinate`` is the (possibly
    jittered) surface coordinate the instance was projected from.
    """

    position: Vec3
    orientation: Quat
    scale: float
    normal: Vec3
    coordinate: SurfaceCoordinate

    def matrix(self) -> np.ndarray:
        """4x4 local-to-parent matrix (translate * rotate * scale)."""
        m = np.eye(4, dtype=np.float64)
        m[:3, :3] = quaternion_to_matrix(self.orientation) * self.scale
        m[:3, 3] = self.position
        return m


def place_on_surface(
    lat: float,
    lon: float,
    radius: float,
    scale: float,
    pole_mapping: str = "poles",
) -> PlacementTransform:
    """Project a coordinate and orient an instance to the surface normal there."""
    point = project(lat, lon, radius, pole_mapping=pole_mapping)  # type: ignore[arg-type]
    return PlacementTransform(
        position=point.position,
        orientation=orientation_from_normal(point.normal),
        scale=float(scale),
        normal=point.normal,
        coordinate=SurfaceCoordinate(float(lat), float(lon)),
    )


@dataclass
class InstanceBatch:
    """Columnar view of a sequence of placements, ready for instanced drawing."""

    positions: np.ndarray     # (N, 3)
    orientations: np.ndarray  # (N, 4) xyzw
    scales: np.ndarray        # (N,)
    normals: np.ndarray       # (N, 3)
    coordinates: np.ndarray   # (N, 2) lat, lon

    def __post_init__(self) -> None:
        n = len(self.positions)
        for name in ("orientations", "scales", "normals", "coordinates"):
            arr = getattr(self, name)
            if arr.shape[0] != n:
                raise ValueError(f"Column '{name}' length {arr.shape[0]} != {n}")

    def __len__(self) -> int:
        return len(self.positions)

    @classmethod
    def from_transforms(cls, transforms: Sequence[PlacementTransform]) -> "InstanceBatch":
        n = len(transforms)
        return cls(
            positions=np.asarray([t.position for t in transforms], dtype=np.float64).reshape(n, 3),
            orientations=np.asarray([t.orientation for t in transforms], dtype=np.float64).reshape(n, 4),
            scales=np.asarray([t.scale for t in transforms], dtype=np.float64).reshape(n),
            normals=np.asarray([t.normal for t in transforms], dtype=np.float64).reshape(n, 3),
            coordinates=np.asarray(
                [(t.coordinate.lat, t.coordinate.lon) for t in transforms], dtype=np.float64
            ).reshape(n, 2),
        )
