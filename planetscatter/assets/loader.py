from __future__ import annotations

import threading
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

import numpy as np
import trimesh

from ..core.utils import get_logger

_log = get_logger()


@dataclass(frozen=True)
class DecorationAsset:
    """Triangle mesh of one decoration, shared by all of its instances."""

    name: str
    path: Path
    vertices: np.ndarray  # (V, 3) float32
    faces: np.ndarray     # (F, 3) int64

    def bounds(self) -> tuple[float, float, float, float, float, float]:
        mn = self.vertices.min(axis=0)
        mx = self.vertices.max(axis=0)
        return (float(mn[0]), float(mx[0]), float(mn[1]), float(mx[1]), float(mn[2]), float(mx[2]))


def load_asset(path: str | Path) -> DecorationAsset:
    """Load a mesh file (glTF/GLB, PLY, OBJ, ...) flattened into a single mesh."""
    path = Path(path)
    mesh = trimesh.load(str(path), force="mesh")
    return DecorationAsset(
        name=path.stem,
        path=path,
        vertices=np.asarray(mesh.vertices, dtype=np.float32),
        faces=np.asarray(mesh.faces, dtype=np.int64),
    )


class AssetLoader:
    """Loads decoration meshes in the background.

    ``load`` returns immediately with a future; repeated requests for the same
    path share one future. Use as a context manager or call ``shutdown``.
    """

    def __init__(self, max_workers: int = 4) -> None:
        self._pool = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="asset")
        self._futures: Dict[Path, Future] = {}
        self._lock = threading.Lock()

    def load(self, path: str | Path) -> "Future[DecorationAsset]":
        key = Path(path).resolve()
        with self._lock:
            fut = self._futures.get(key)
            if fut is None:
                _log.debug("Loading asset %s", key.name)
                fut = self._pool.submit(load_asset, key)
                self._futures[key] = fut
            return fut

    def shutdown(self, wait: bool = True) -> None:
        self._pool.shutdown(wait=wait)

    def __enter__(self) -> "AssetLoader":
        return self

    def __exit__(self, exc_type, exc, tb) -> Optional[bool]:
        self.shutdown()
        return None
