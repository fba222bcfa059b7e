# cutgraph/graph/weights.py
"""Edge weight routines: color distance, normal angle, depth gating.

All functions accept single samples or arrays; the last axis of colors and
normals holds the three channels, everything else broadcasts.
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from cutgraph.config import (
    COLOR_SCALE,
    GRAPH_ANGLE_FALLBACK,
    GRAPH_DEPTH_RATIO,
    GRAPH_ZERO_VARIANCE_WEIGHT,
)


def color_distance(c0: npt.ArrayLike, c1: npt.ArrayLike) -> np.ndarray:
    """Euclidean distance of 8-bit RGB colors in per-channel [0, 1] space."""
    rgb0 = np.asarray(c0, dtype=np.float64) / COLOR_SCALE
    rgb1 = np.asarray(c1, dtype=np.float64) / COLOR_SCALE
    d = rgb0 - rgb1
    return np.sqrt(np.sum(d * d, axis=-1))


def normalize_color_distance(
    raw: npt.ArrayLike,
    max_color: float,
    *,
    zero_variance_weight: float = GRAPH_ZERO_VARIANCE_WEIGHT,
) -> np.ndarray:
    """Scale raw distances by the frame maximum.

    A frame without color variance (``max_color == 0``) maps every pair to
    ``zero_variance_weight`` instead of dividing by zero.
    """
    raw = np.asarray(raw, dtype=np.float64)
    if max_color <= 0.0:
        return np.full(raw.shape, zero_variance_weight, dtype=np.float64)
    return raw / max_color


def normal_angle(
    n0: npt.ArrayLike,
    n1: npt.ArrayLike,
    valid0: npt.ArrayLike = True,
    valid1: npt.ArrayLike = True,
    *,
    fallback: float = GRAPH_ANGLE_FALLBACK,
) -> np.ndarray:
    """Angle in radians between unit normals.

    Returns ``fallback`` where an endpoint is invalid or the dot product lies
    outside [-1, 1] (including NaN). Out-of-range dot products are not clipped.
    """
    dot = np.sum(np.asarray(n0, dtype=np.float64) * np.asarray(n1, dtype=np.float64), axis=-1)
    ok = np.logical_and(valid0, valid1) & (dot >= -1.0) & (dot <= 1.0)
    with np.errstate(invalid="ignore"):
        angle = np.arccos(np.where(ok, dot, 0.0))
    return np.where(ok, angle, fallback)


def depth_continuous(
    z0: npt.ArrayLike,
    z1: npt.ArrayLike,
    valid0: npt.ArrayLike = True,
    valid1: npt.ArrayLike = True,
    *,
    ratio: float = GRAPH_DEPTH_RATIO,
) -> np.ndarray:
    """True where both samples are valid and ``|z0 - z1| < ratio * z0``."""
    z0 = np.asarray(z0, dtype=np.float64)
    z1 = np.asarray(z1, dtype=np.float64)
    with np.errstate(invalid="ignore"):
        close = np.abs(z0 - z1) < ratio * z0
    return np.logical_and(valid0, valid1) & close


__all__ = [
    "color_distance",
    "depth_continuous",
    "normal_angle",
    "normalize_color_distance",
]
