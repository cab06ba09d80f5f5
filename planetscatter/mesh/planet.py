from __future__ import annotations

from pathlib import Path
from typing import Tuple

import numpy as np

from ..core.utils import ensure_unit_vectors

GRASS_RGB = (96, 160, 72)


def generate_planet_mesh(
    radius: float,
    width_segments: int = 15,
    height_segments: int = 15,
    color: Tuple[int, int, int] = GRASS_RGB,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """UV sphere laid out like a three.js ``SphereGeometry``.

    Returns ``(vertices, faces, colors, normals)``. The seam column and both
    pole rows are duplicated so UVs stay continuous; pole caps get one
    triangle per quad.
    """
    if radius <= 0.0:
        raise ValueError("radius must be positive.")
    if width_segments < 3 or height_segments < 2:
        raise ValueError("Need at least 3 width segments and 2 height segments.")

    u = np.linspace(0.0, 1.0, width_segments + 1, dtype=np.float64)
    v = np.linspace(0.0, 1.0, height_segments + 1, dtype=np.float64)
    vv, uu = np.meshgrid(v, u, indexing="ij")
    vertices = np.column_stack(
        [
            (-radius * np.cos(uu * 2.0 * np.pi) * np.sin(vv * np.pi)).ravel(),
            (radius * np.cos(vv * np.pi)).ravel(),
            (radius * np.sin(uu * 2.0 * np.pi) * np.sin(vv * np.pi)).ravel(),
        ]
    )

    row = width_segments + 1
    faces = []
    for iy in range(height_segments):
        for ix in range(width_segments):
            a = iy * row + ix + 1
            b = iy * row + ix
            c = (iy + 1) * row + ix
            d = (iy + 1) * row + ix + 1
            if iy != 0:
                faces.append([a, b, d])
            if iy != height_segments - 1:
                faces.append([b, c, d])

    normals = ensure_unit_vectors(vertices)
    colors = np.tile(np.asarray(color, dtype=np.uint8), (vertices.shape[0], 1))
    return (
        vertices.astype(np.float32),
        np.asarray(faces, dtype=np.int64),
        colors,
        normals.astype(np.float32),
    )


def write_ascii_ply(path: Path, vertices: np.ndarray, faces: np.ndarray, colors: np.ndarray, normals: np.ndarray) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write("ply\n")
        f.write("format ascii 1.0\n")
        f.write(f"element vertex {len(vertices)}\n")
        f.write("property float x\nproperty float y\nproperty float z\n")
        f.write("property float nx\nproperty float ny\nproperty float nz\n")
        f.write("property uchar red\nproperty uchar green\nproperty uchar blue\n")
        f.write(f"element face {len(faces)}\n")
        f.write("property list uchar int vertex_indices\n")
        f.write("end_header\n")
        for (x, y, z), (nx, ny, nz), (r, g, b) in zip(vertices, normals, colors):
            f.write(f"{x:.6f} {y:.6f} {z:.6f} {nx:.6f} {ny:.6f} {nz:.6f} {int(r)} {int(g)} {int(b)}\n")
        for tri in faces:
            f.write(f"3 {tri[0]} {tri[1]} {tri[2]}\n")
