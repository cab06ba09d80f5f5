from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional
import json
import pathlib

import numpy as np

from .placement import InstanceBatch
from .utils import get_logger

_log = get_logger()


@dataclass
class _Layer:
    name: str
    asset: Optional[str]
    batch: InstanceBatch


@dataclass
class JsonWriter:
    """Instance manifest for a renderer: one entry per layer, one record per instance.

    Layers are buffered and the document is written once on close.
    """
    path: str
    radius: Optional[float] = None
    indent: Optional[int] = None

    def __post_init__(self) -> None:
        self._layers: List[_Layer] = []

    def write_layer(self, name: str, asset: Optional[str], batch: InstanceBatch) -> None:
        self._layers.append(_Layer(name, asset, batch))

    def close(self) -> None:
        doc: Dict[str, Any] = {"radius": self.radius, "layers": []}
        for layer in self._layers:
            b = layer.batch
            instances = [
                {
                    "position": b.positions[k].tolist(),
                    "quaternion": b.orientations[k].tolist(),
                    "scale": float(b.scales[k]),
                }
                for k in range(len(b))
            ]
            doc["layers"].append({"name": layer.name, "asset": layer.asset, "instances": instances})
        path = pathlib.Path(self.path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(doc, f, indent=self.indent)
        _log.info("Wrote %d layers to %s", len(self._layers), path.name)
        self._layers.clear()


# Columnar NPZ and PLY writers for analysis / debugging
class NpzWriter:
    def __init__(self, path: str) -> None:
        self.path = path
        self._layers: List[_Layer] = []

    def write_layer(self, name: str, asset: Optional[str], batch: InstanceBatch) -> None:
        self._layers.append(_Layer(name, asset, batch))

    def close(self) -> None:
        if not self._layers:
            return
        path = pathlib.Path(self.path)
        path.parent.mkdir(parents=True, exist_ok=True)
        batches = [layer.batch for layer in self._layers]
        out: Dict[str, np.ndarray] = {
            "position": np.concatenate([b.positions for b in batches], axis=0),
            "quaternion": np.concatenate([b.orientations for b in batches], axis=0),
            "scale": np.concatenate([b.scales for b in batches], axis=0),
            "normal": np.concatenate([b.normals for b in batches], axis=0),
            "latlon": np.concatenate([b.coordinates for b in batches], axis=0),
            "layer_id": np.concatenate(
                [np.full(len(b), idx, dtype=np.uint16) for idx, b in enumerate(batches)]
            ),
            "layer_names": np.asarray([layer.name for layer in self._layers]),
        }
        np.savez_compressed(path, **out)
        self._layers.clear()


class PlyWriter:
    def __init__(self, path: str) -> None:
        self.path = path
        self._layers: List[_Layer] = []

    def write_layer(self, name: str, asset: Optional[str], batch: InstanceBatch) -> None:
        self._layers.append(_Layer(name, asset, batch))

    def close(self) -> None:
        if not self._layers:
            return
        # ASCII PLY, one vertex per instance (buffered, written once on close)
        path = pathlib.Path(self.path)
        path.parent.mkdir(parents=True, exist_ok=True)
        n = sum(len(layer.batch) for layer in self._layers)
        with open(path, "w", encoding="utf-8") as f:
            f.write("ply\nformat ascii 1.0\n")
            for idx, layer in enumerate(self._layers):
                f.write(f"comment layer {idx} {layer.name}\n")
            f.write(f"element vertex {n}\n")
            f.write("property float x\nproperty float y\nproperty float z\n")
            f.write("property float nx\nproperty float ny\nproperty float nz\n")
            f.write("property float scale\nproperty ushort layer\n")
            f.write("end_header\n")
            for idx, layer in enumerate(self._layers):
                b = layer.batch
                for (x, y, z), (nx, ny, nz), s in zip(b.positions, b.normals, b.scales):
                    f.write(f"{x:.6f} {y:.6f} {z:.6f} {nx:.6f} {ny:.6f} {nz:.6f} {s:.6f} {idx}\n")
        self._layers.clear()
