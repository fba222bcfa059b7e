# tests/conftest.py
"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Callable, Optional

import numpy as np
import pytest

from cutgraph.core.types import Relation
from cutgraph.vision.frame import OrganizedFrame

FrameFactory = Callable[..., OrganizedFrame]


def _make_frame(
    width: int,
    height: int,
    *,
    depth: float | np.ndarray = 1.0,
    colors: Optional[np.ndarray] = None,
    normals: Optional[np.ndarray] = None,
    curvature: Optional[np.ndarray] = None,
    valid: Optional[np.ndarray] = None,
) -> OrganizedFrame:
    rows, cols = np.mgrid[0:height, 0:width]
    z = np.broadcast_to(np.asarray(depth, dtype=np.float64), (height, width))
    points = np.stack([cols * 0.001, rows * 0.001, z], axis=-1)
    if colors is None:
        colors = np.full((height, width, 3), 128, dtype=np.uint8)
    if normals is None:
        normals = np.zeros((height, width, 3))
        normals[..., 2] = 1.0
    return OrganizedFrame.create(
        width=width,
        height=height,
        points=points,
        colors=colors,
        normals=normals,
        curvature=curvature,
        valid=valid,
    )


@pytest.fixture
def make_frame() -> FrameFactory:
    """Factory for flat, uniformly colored frames facing the camera."""
    return _make_frame


@pytest.fixture
def uniform_frame_2x2() -> OrganizedFrame:
    """2x2 fully valid frame with a single color."""
    return _make_frame(2, 2)


@pytest.fixture
def textured_frame() -> OrganizedFrame:
    """6x5 flat frame with random colors and slightly tilted normals."""
    rng = np.random.default_rng(7)
    colors = rng.integers(0, 256, size=(5, 6, 3), dtype=np.uint8)
    normals = rng.normal(size=(5, 6, 3)) * 0.1
    normals[..., 2] = 1.0
    normals /= np.linalg.norm(normals, axis=-1, keepdims=True)
    return _make_frame(6, 5, colors=colors, normals=normals)


@pytest.fixture
def sample_relations() -> list[Relation]:
    """Classifier output over 5 nodes; nodes 3 and 4 lack a direct link to 0."""
    return [
        Relation(id_0=0, id_1=1, ground_truth=1, rel_probability=(0.9, 0.1)),
        Relation(id_0=1, id_1=2, ground_truth=0, rel_probability=(0.3, 0.7)),
        Relation(id_0=0, id_1=2, rel_probability=(0.6, 0.4)),
        Relation(id_0=2, id_1=3, rel_probability=(0.2, 0.8)),
        Relation(id_0=4, id_1=0, rel_probability=(0.5, 0.5)),
    ]
