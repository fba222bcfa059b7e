# tests/test_frame.py
"""Tests for organized frame validation."""

from __future__ import annotations

import numpy as np
import pytest

from cutgraph.vision.frame import OrganizedFrame


def _flat(width: int, height: int) -> dict:
    n = width * height
    return {
        "points": np.ones((n, 3)),
        "colors": np.zeros((n, 3), dtype=np.uint8),
        "normals": np.tile([0.0, 0.0, 1.0], (n, 1)),
    }


def test_flat_buffers_are_reshaped_row_major() -> None:
    data = _flat(4, 2)
    data["points"][5] = (7.0, 8.0, 9.0)
    frame = OrganizedFrame.create(width=4, height=2, **data)

    assert frame.points.shape == (2, 4, 3)
    assert frame.points[1, 1].tolist() == [7.0, 8.0, 9.0]
    assert frame.index(col=1, row=1) == 5
    assert (frame.width, frame.height, frame.size) == (4, 2, 8)


def test_size_must_match_declared_grid() -> None:
    data = _flat(4, 2)
    with pytest.raises(ValueError, match="points must be"):
        OrganizedFrame.create(width=3, height=3, **data)


def test_normals_shape_is_validated() -> None:
    data = _flat(2, 2)
    data["normals"] = np.zeros((3, 3))
    with pytest.raises(ValueError, match="normals must be"):
        OrganizedFrame.create(width=2, height=2, **data)


def test_empty_grid_rejected() -> None:
    with pytest.raises(ValueError, match="non-empty"):
        OrganizedFrame.create(width=0, height=2, points=[], colors=[], normals=[])


def test_colors_must_be_8bit() -> None:
    data = _flat(2, 1)
    data["colors"] = np.array([[0, 0, 300], [0, 0, 0]])
    with pytest.raises(ValueError, match="8-bit"):
        OrganizedFrame.create(width=2, height=1, **data)


def test_validity_requires_flag_and_finite_depth() -> None:
    data = _flat(3, 1)
    data["points"][0, 2] = np.nan
    frame = OrganizedFrame.create(
        width=3, height=1, valid=np.array([True, True, False]), **data
    )
    assert frame.valid.tolist() == [[False, True, False]]


def test_curvature_defaults_to_zero() -> None:
    frame = OrganizedFrame.create(width=2, height=1, **_flat(2, 1))
    assert frame.max_curvature() == 0.0
    assert frame.normalized_curvature().tolist() == [[0.0, 0.0]]


def test_normalized_curvature_ignores_invalid_samples() -> None:
    data = _flat(3, 1)
    data["points"][2, 2] = np.nan
    frame = OrganizedFrame.create(
        width=3, height=1, curvature=np.array([0.1, 0.4, 5.0]), **data
    )
    assert frame.max_curvature() == pytest.approx(0.4)
    out = frame.normalized_curvature()
    assert out[0, :2] == pytest.approx([0.25, 1.0])
    assert np.isnan(out[0, 2])
