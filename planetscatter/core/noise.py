from __future__ import annotations

from typing import Union

import numpy as np

ArrayLike = Union[float, np.ndarray]

_X_FREQ = 12.9898
_Y_FREQ = 78.233
_AMPLITUDE = 43758.5453


def noise(x: ArrayLike, y: ArrayLike) -> ArrayLike:
    """Hash-style pseudo-random value in ``[0, 1)`` for a 2D coordinate.

    ``fract(sin(x * 12.9898 + y * 78.233) * 43758.5453)``. Pure and stateless:
    the same ``(x, y)`` always gives the same value. Scalars in, ``float`` out;
    arrays broadcast. Non-finite inputs yield NaN rather than raising.
    """
    xa = np.asarray(x, dtype=np.float64)
    ya = np.asarray(y, dtype=np.float64)
    with np.errstate(invalid="ignore", over="ignore"):
        n = np.sin(xa * _X_FREQ + ya * _Y_FREQ) * _AMPLITUDE
        frac = n - np.floor(n)
        # tiny negative n rounds n - floor(n) up to exactly 1.0
        frac = np.where(frac >= 1.0, 0.0, frac)
    if frac.ndim == 0:
        return float(frac)
    return frac
