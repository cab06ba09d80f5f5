from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Sequence, Tuple

import numpy as np

from ..errors import InvalidConfiguration

Vec3 = Tuple[float, float, float]
Quat = Tuple[float, float, float, float]  # (x, y, z, w)
PoleMapping = Literal["poles", "legacy"]

UP: Vec3 = (0.0, 1.0, 0.0)
IDENTITY: Quat = (0.0, 0.0, 0.0, 1.0)

# Latitude factor inside theta = (0.5 - lat * k) * pi.
POLE_MAPPINGS = {
    "poles": 0.5,   # lat=+1 north pole, lat=-1 south pole
    "legacy": 1.0,  # literal demo formula, lat=0.5 is the north pole
}

_ANTIPARALLEL_EPS = np.finfo(np.float64).eps


@dataclass(frozen=True)
class SurfacePoint:
    """A point on the sphere surface and its outward unit normal."""

    position: Vec3
    normal: Vec3


def _latitude_factor(pole_mapping: str) -> float:
    try:
        return POLE_MAPPINGS[pole_mapping]
    except KeyError:
        raise InvalidConfiguration(
            f"pole_mapping must be one of {sorted(POLE_MAPPINGS)}, got '{pole_mapping}'."
        ) from None


def project(lat: float, lon: float, radius: float, pole_mapping: PoleMapping = "poles") -> SurfacePoint:
    """Map a normalized (lat, lon) pair onto a sphere of ``radius``.

    ``phi = lon * 2pi`` and ``theta = (0.5 - lat * k) * pi``, with ``k`` set by
    ``pole_mapping``. The normal is the normalized position.

    ``"poles"`` sends lat = +1 and -1 to the poles. ``"legacy"`` uses
    ``theta = (0.5 - lat) * pi`` and reproduces the original demo planet's
    visual placement, where lat = 0.5 is already the north pole.
    """
    if radius <= 0:
        raise InvalidConfiguration("radius must be positive.")
    k = _latitude_factor(pole_mapping)
    with np.errstate(invalid="ignore", over="ignore"):
        phi = np.float64(lon) * np.pi * 2.0
        theta = (0.5 - np.float64(lat) * k) * np.pi
        sin_t = np.sin(theta)
        pos = np.array(
            [
                radius * sin_t * np.cos(phi),
                radius * np.cos(theta),
                radius * sin_t * np.sin(phi),
            ],
            dtype=np.float64,
        )
        normal = pos / np.linalg.norm(pos)
    return SurfacePoint(
        position=(float(pos[0]), float(pos[1]), float(pos[2])),
        normal=(float(normal[0]), float(normal[1]), float(normal[2])),
    )


def orientation_from_normal(normal: Sequence[float], up: Sequence[float] = UP) -> Quat:
    """Shortest-arc rotation taking unit vector ``up`` onto unit vector ``normal``.

    When the two are anti-parallel the arc is undefined; a half turn about an
    axis perpendicular to ``up`` is returned instead.
    """
    fx, fy, fz = (float(c) for c in up)
    tx, ty, tz = (float(c) for c in normal)
    r = fx * tx + fy * ty + fz * tz + 1.0
    if r < _ANTIPARALLEL_EPS:
        r = 0.0
        if abs(fx) > abs(fz):
            q = np.array([-fy, fx, 0.0, r])
        else:
            q = np.array([0.0, -fz, fy, r])
    else:
        q = np.array(
            [
                fy * tz - fz * ty,
                fz * tx - fx * tz,
                fx * ty - fy * tx,
                r,
            ]
        )
    with np.errstate(invalid="ignore", divide="ignore"):
        q = q / np.linalg.norm(q)
    return (float(q[0]), float(q[1]), float(q[2]), float(q[3]))


def quaternion_multiply(a: Sequence[float], b: Sequence[float]) -> Quat:
    """Hamilton product ``a * b`` (apply ``b`` first, then ``a``)."""
    ax, ay, az, aw = a
    bx, by, bz, bw = b
    return (
        ax * bw + aw * bx + ay * bz - az * by,
        ay * bw + aw * by + az * bx - ax * bz,
        az * bw + aw * bz + ax * by - ay * bx,
        aw * bw - ax * bx - ay * by - az * bz,
    )


def quaternion_from_axis_angle(axis: Sequence[float], angle_rad: float) -> Quat:
    half = 0.5 * angle_rad
    s = np.sin(half)
    ax = np.asarray(axis, dtype=np.float64)
    ax = ax / np.linalg.norm(ax)
    return (float(ax[0] * s), float(ax[1] * s), float(ax[2] * s), float(np.cos(half)))


def quaternion_to_matrix(q: Sequence[float]) -> np.ndarray:
    x, y, z, w = (float(c) for c in q)
    x2, y2, z2 = x + x, y + y, z + z
    xx, xy, xz = x * x2, x * y2, x * z2
    yy, yz, zz = y * y2, y * z2, z * z2
    wx, wy, wz = w * x2, w * y2, w * z2
    return np.array(
        [
            [1.0 - (yy + zz), xy - wz, xz + wy],
            [xy + wz, 1.0 - (xx + zz), yz - wx],
            [xz - wy, yz + wx, 1.0 - (xx + yy)],
        ],
        dtype=np.float64,
    )


def rotate_vector(q: Sequence[float], v: Sequence[float]) -> Vec3:
    out = quaternion_to_matrix(q) @ np.asarray(v, dtype=np.float64)
    return (float(out[0]), float(out[1]), float(out[2]))
