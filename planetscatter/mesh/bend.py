from __future__ import annotations

import numpy as np
import trimesh


def bend_vertices(vertices: np.ndarray, strength: float) -> np.ndarray:
    """Sag a flat mesh into a shallow bowl.

    Each vertex drops by ``d**2 * strength`` along -Y, where ``d`` is its XZ
    distance to the centre of the vertex bounding box. Returns a new array.
    """
    verts = np.asarray(vertices, dtype=np.float64)
    if verts.ndim != 2 or verts.shape[1] != 3:
        raise ValueError("vertices must have shape (N, 3).")
    out = verts.copy()
    if len(out) == 0:
        return out
    center = 0.5 * (out.min(axis=0) + out.max(axis=0))
    dx = out[:, 0] - center[0]
    dz = out[:, 2] - center[2]
    out[:, 1] -= (dx * dx + dz * dz) * strength
    return out


def bend_mesh(mesh: trimesh.Trimesh, strength: float) -> trimesh.Trimesh:
    """Bent copy of ``mesh``; vertex normals are recomputed from the new shape."""
    bent = mesh.copy()
    bent.vertices = bend_vertices(mesh.vertices, strength)
    return bent


def bend_scene(scene: trimesh.Scene, strength: float) -> trimesh.Scene:
    """Bent copy of a multi-part asset.

    Each geometry sags around its own bounding-box centre, in its own local
    frame; node transforms are left untouched.
    """
    bent = scene.copy()
    for geom in bent.geometry.values():
        if isinstance(geom, trimesh.Trimesh):
            geom.vertices = bend_vertices(geom.vertices, strength)
    return bent
