# cutgraph/vision/io.py
"""Input/output helpers for organized frames and classifier relations."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import numpy as np
import numpy.typing as npt
import open3d as o3d

from cutgraph.config import COLOR_SCALE, FRAME_NPZ_KEYS
from cutgraph.core.types import Relation
from cutgraph.utils.io import atomic_save_npz, read_document
from cutgraph.utils.logger import get_logger
from cutgraph.vision.frame import OrganizedFrame

LOGGER = get_logger(__name__)


def load_frame(path: Path) -> OrganizedFrame:
    """Load an ``.npz`` frame with (H, W, ...) arrays.

    Required keys are ``points``, ``colors`` and ``normals``; ``curvature``
    and ``valid`` are optional.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"frame not found: {path}")
    with np.load(path) as data:
        missing = [key for key in FRAME_NPZ_KEYS if key not in data.files]
        if missing:
            raise ValueError(f"{path.name} is missing arrays: {missing}")
        points = data["points"]
        if points.ndim != 3:
            raise ValueError(f"points in {path.name} must be (H, W, 3), got {points.shape}")
        height, width = points.shape[:2]
        frame = OrganizedFrame.create(
            width=width,
            height=height,
            points=points,
            colors=data["colors"],
            normals=data["normals"],
            curvature=data["curvature"] if "curvature" in data.files else None,
            valid=data["valid"] if "valid" in data.files else None,
        )
    LOGGER.info("Loaded frame {} ({}x{})", path.name, width, height)
    return frame


def save_frame(path: Path, frame: OrganizedFrame) -> None:
    atomic_save_npz(
        Path(path),
        points=frame.points,
        colors=frame.colors,
        normals=frame.normals,
        curvature=frame.curvature,
        valid=frame.valid,
    )
    LOGGER.info("Saved frame {} ({}x{})", Path(path).name, frame.width, frame.height)


def frame_from_open3d(
    cloud: o3d.geometry.PointCloud,
    width: int,
    height: int,
    *,
    curvature: Optional[npt.ArrayLike] = None,
) -> OrganizedFrame:
    """Wrap an organized Open3D cloud (row-major, NaN points kept).

    Open3D stores colors as floats in [0, 1]; they are scaled back to 8-bit.
    A cloud without normals gets NaN normals, so every angle falls back.
    """
    points = np.asarray(cloud.points, dtype=np.float64)
    if points.shape[0] != width * height:
        raise ValueError(
            f"cloud has {points.shape[0]} points, expected {width}x{height}={width * height}"
        )
    if cloud.has_colors():
        colors = np.clip(np.asarray(cloud.colors, dtype=np.float64), 0.0, 1.0) * COLOR_SCALE
    else:
        colors = np.zeros_like(points)
    if cloud.has_normals():
        normals = np.asarray(cloud.normals, dtype=np.float64)
    else:
        LOGGER.warning("Cloud has no normals, angle weights will use the fallback")
        normals = np.full_like(points, np.nan)
    return OrganizedFrame.create(
        width=width,
        height=height,
        points=points,
        colors=colors,
        normals=normals,
        curvature=curvature,
    )


def read_organized_cloud(path: Path, width: int, height: int) -> OrganizedFrame:
    """Read a PCD/PLY file without dropping NaN points and wrap it as a frame."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"cloud not found: {path}")
    cloud = o3d.io.read_point_cloud(
        str(path), remove_nan_points=False, remove_infinite_points=False
    )
    LOGGER.info("Loaded cloud {} with {} points", path.name, len(cloud.points))
    return frame_from_open3d(cloud, width, height)


def load_relations(path: Path) -> List[Relation]:
    """Read classifier relations from a JSON or YAML list of mappings."""
    path = Path(path)
    data = read_document(path)
    if isinstance(data, dict):
        data = data.get("relations", [])
    relations = [Relation.from_dict(item) for item in data]
    LOGGER.info("Loaded {} relations from {}", len(relations), path.name)
    return relations


__all__ = [
    "frame_from_open3d",
    "load_frame",
    "load_relations",
    "read_organized_cloud",
    "save_frame",
]
