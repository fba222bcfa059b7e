# cutgraph/graph/grid.py
"""Graph construction over the 4-neighbor lattice of an organized frame."""

from __future__ import annotations

from typing import Tuple

import numpy as np

from cutgraph.config import DEFAULT_GRAPH_CONFIG, EDGE_TYPE_NEIGHBOR, GraphConfig
from cutgraph.core.types import BuildResult, Edge
from cutgraph.graph.weights import (
    color_distance,
    depth_continuous,
    normal_angle,
    normalize_color_distance,
)
from cutgraph.utils.logger import get_logger
from cutgraph.vision.frame import OrganizedFrame

LOGGER = get_logger(__name__)

# Neighbor order per pixel; edges are emitted in this order.
DIRECTIONS: Tuple[str, ...] = ("right", "down", "down_right", "down_left")
DOWN_LEFT = DIRECTIONS.index("down_left")


def neighbor_pairs(width: int, height: int) -> Tuple[np.ndarray, np.ndarray]:
    """Node ids of every considered pair, shaped (height-1, width-1, 4).

    Pixels span ``[0, width-1) x [0, height-1)``. Offsets are flat row-major,
    so the down-left pair of the first column addresses the last pixel of the
    same row.
    """
    rows, cols = height - 1, width - 1
    idx = np.arange(width * height, dtype=np.int64).reshape(height, width)[:rows, :cols]
    offsets = np.array([1, width, width + 1, width - 1], dtype=np.int64)
    a = np.broadcast_to(idx[..., None], (rows, cols, len(DIRECTIONS)))
    b = a + offsets
    return np.ascontiguousarray(a), b


def build_from_point_cloud(
    frame: OrganizedFrame, *, config: GraphConfig | None = None
) -> BuildResult:
    """Build the weighted lattice graph of one frame.

    ``w`` is the color distance normalized by the frame maximum, ``w2`` the
    normal angle. A pair is emitted only if both samples are valid and their
    depths are continuous; there is no weight penalty for gated pairs.
    """
    cfg = config or DEFAULT_GRAPH_CONFIG
    width, height = frame.width, frame.height
    if width < 2 or height < 2:
        LOGGER.tag("GRID", "frame {}x{} has no interior pixels", width, height, level="warning")
        return BuildResult()

    LOGGER.debug("Max curvature: {:.5f}", frame.max_curvature())

    a, b = neighbor_pairs(width, height)
    colors = frame.colors.reshape(-1, 3)
    normals = frame.normals.reshape(-1, 3)
    depth = frame.depth.reshape(-1)
    valid = frame.valid.reshape(-1)

    first_column = np.zeros(a.shape, dtype=bool)
    first_column[:, 0, DOWN_LEFT] = True

    raw = color_distance(colors[a], colors[b])
    raw[first_column] = cfg.first_column_weight
    scored = raw[~first_column]
    max_color = float(scored.max()) if scored.size else 0.0
    if max_color <= 0.0:
        LOGGER.tag(
            "GRID",
            "no color variance, weights set to {}",
            cfg.zero_variance_weight,
            level="warning",
        )

    w = normalize_color_distance(raw, max_color, zero_variance_weight=cfg.zero_variance_weight)
    w[first_column] = cfg.first_column_weight

    w2 = normal_angle(
        normals[a], normals[b], valid[a], valid[b], fallback=cfg.angle_fallback
    )
    w2[first_column] = cfg.angle_fallback

    keep = depth_continuous(depth[a], depth[b], valid[a], valid[b], ratio=cfg.depth_ratio)
    if not cfg.link_first_column:
        keep &= ~first_column

    edges = [
        Edge(a=p, b=q, type=EDGE_TYPE_NEIGHBOR, w=x, w2=y)
        for p, q, x, y in zip(
            a[keep].tolist(), b[keep].tolist(), w[keep].tolist(), w2[keep].tolist()
        )
    ]
    LOGGER.tag(
        "GRID",
        "{}x{}: {} edges from {} pairs (max color {:.4f})",
        width,
        height,
        len(edges),
        keep.size,
        max_color,
        level="debug",
    )
    return BuildResult(edges=edges)


__all__ = ["DIRECTIONS", "build_from_point_cloud", "neighbor_pairs"]
