# cutgraph/vision/frame.py
"""Organized sensor frame: a point grid with colors, normals and curvature."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np
import numpy.typing as npt

from cutgraph.utils.logger import get_logger

LOGGER = get_logger(__name__)


def _grid(
    name: str, arr: npt.ArrayLike, height: int, width: int, depth: int | None, dtype
) -> np.ndarray:
    out = np.asarray(arr, dtype=dtype)
    shape = (height, width) if depth is None else (height, width, depth)
    if out.shape != shape:
        # flat row-major buffers are accepted when they hold exactly height*width samples
        flat = (height * width,) if depth is None else (height * width, depth)
        if out.shape != flat:
            raise ValueError(f"{name} must be {shape} or {flat}, got {out.shape}")
        out = out.reshape(shape)
    return out


@dataclass(frozen=True)
class OrganizedFrame:
    """Pixel-aligned 3D frame with a parallel unit-normal grid.

    Attributes:
        points: (H, W, 3) float64 positions; NaN z marks undefined depth
        colors: (H, W, 3) uint8 RGB
        normals: (H, W, 3) float64 unit normals
        curvature: (H, W) float64 local surface curvature
        valid: (H, W) bool; a sample is valid only if flagged and its z is finite
    """

    points: np.ndarray
    colors: np.ndarray
    normals: np.ndarray
    curvature: np.ndarray
    valid: np.ndarray

    @classmethod
    def create(
        cls,
        width: int,
        height: int,
        points: npt.ArrayLike,
        colors: npt.ArrayLike,
        normals: npt.ArrayLike,
        curvature: Optional[npt.ArrayLike] = None,
        valid: Optional[npt.ArrayLike] = None,
    ) -> "OrganizedFrame":
        """Validate buffers against the declared grid size and build a frame.

        Every buffer may be given as (H, W, ...) or as a flat row-major
        (H*W, ...) array.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"grid must be non-empty, got {width}x{height}")
        pts = _grid("points", points, height, width, 3, np.float64)
        cols = _grid("colors", colors, height, width, 3, np.float64)
        if not np.all(np.isfinite(cols)) or np.any(cols < 0) or np.any(cols > 255):
            raise ValueError("colors must be 8-bit RGB values in [0, 255]")
        nrm = _grid("normals", normals, height, width, 3, np.float64)
        if curvature is None:
            curv = np.zeros((height, width), dtype=np.float64)
        else:
            curv = _grid("curvature", curvature, height, width, None, np.float64)
        finite = np.isfinite(pts[..., 2])
        if valid is None:
            mask = finite
        else:
            mask = _grid("valid", valid, height, width, None, bool) & finite
        LOGGER.debug(
            "Frame {}x{} with {} valid samples", width, height, int(np.count_nonzero(mask))
        )
        return cls(
            points=pts,
            colors=np.rint(cols).astype(np.uint8),
            normals=nrm,
            curvature=curv,
            valid=mask,
        )

    @property
    def height(self) -> int:
        return int(self.points.shape[0])

    @property
    def width(self) -> int:
        return int(self.points.shape[1])

    @property
    def size(self) -> int:
        return self.width * self.height

    @property
    def depth(self) -> np.ndarray:
        return self.points[..., 2]

    def index(self, col: int, row: int) -> int:
        """Row-major node id of a pixel."""
        return row * self.width + col

    def max_curvature(self) -> float:
        """Largest curvature over valid samples, 0.0 if none."""
        values = self.curvature[self.valid]
        values = values[np.isfinite(values)]
        return float(values.max()) if values.size else 0.0

    def normalized_curvature(self) -> np.ndarray:
        """Curvature scaled to [0, 1] by the frame maximum; invalid samples are NaN."""
        max_curv = self.max_curvature()
        out = np.full(self.curvature.shape, np.nan, dtype=np.float64)
        if max_curv > 0:
            out[self.valid] = self.curvature[self.valid] / max_curv
        else:
            out[self.valid] = 0.0
        return out


__all__ = ["OrganizedFrame"]
