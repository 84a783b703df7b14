"""Hyperspherical coordinates on R^n.

For x in R^n the coordinates are (r, t1, ..., t_{n-1}) with

    x_0     = r cos(t1)
    x_k     = r sin(t1) ... sin(tk) cos(t_{k+1}),   k = 1 .. n-2
    x_{n-1} = r sin(t1) ... sin(t_{n-1})

where t1 .. t_{n-2} lie in [0, pi] and t_{n-1} in (-pi, pi].
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np


def cartesian_to_hyperspherical(x: Sequence[float] | np.ndarray) -> np.ndarray:
    """Map (n,) Cartesian coordinates to (radius, n-1 angles)."""
    x = np.asarray(x, dtype=np.float64).ravel()
    n = x.size
    if n < 2:
        error_message = f"Need at least 2 coordinates; got {n}."
        raise ValueError(error_message)
    # tails[k] = |(x_k, ..., x_{n-1})|
    tails = np.empty(n, dtype=np.float64)
    tails[-1] = np.abs(x[-1])
    for k in range(n - 2, -1, -1):
        tails[k] = np.hypot(tails[k + 1], x[k])
    out = np.empty(n, dtype=np.float64)
    out[0] = tails[0]
    for k in range(1, n - 1):
        out[k] = np.arctan2(tails[k], x[k - 1])
    out[n - 1] = np.arctan2(x[n - 1], x[n - 2])
    return out


def hyperspherical_to_cartesian(
    radius: float,
    angles: Sequence[float] | np.ndarray,
) -> np.ndarray:
    """Map a radius and n-1 angles back to (n,) Cartesian coordinates."""
    angles = np.asarray(angles, dtype=np.float64).ravel()
    out = np.empty(angles.size + 1, dtype=np.float64)
    sin_product = float(radius)
    for k, angle in enumerate(angles):
        out[k] = sin_product * np.cos(angle)
        sin_product *= np.sin(angle)
    out[-1] = sin_product
    return out
