# cutgraph/core/types.py
"""Edge, relation and build result types shared by both graph builders."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

import numpy as np
import numpy.typing as npt

from cutgraph.config import EDGE_TYPE_NEIGHBOR, UNKNOWN_GROUND_TRUTH


@dataclass(frozen=True, slots=True)
class Edge:
    """Weighted undirected edge handed to the min-cut solver.

    Attributes:
        a: first node id
        b: second node id
        type: provenance tag
        w: primary weight (normalized color distance or P(connected))
        w2: secondary weight (normal angle in radians, 0.0 when unused)
    """

    a: int
    b: int
    type: int = EDGE_TYPE_NEIGHBOR
    w: float = 0.0
    w2: float = 0.0


@dataclass(frozen=True, slots=True)
class Relation:
    """Pairwise judgment from an external classifier.

    ``rel_probability`` is ``(P(connected), P(separated))``.
    """

    id_0: int
    id_1: int
    ground_truth: int = UNKNOWN_GROUND_TRUTH
    type: int = EDGE_TYPE_NEIGHBOR
    rel_probability: Tuple[float, float] = (0.0, 0.0)

    def __post_init__(self) -> None:
        if len(self.rel_probability) != 2:
            raise ValueError(
                f"rel_probability must have 2 entries, got {len(self.rel_probability)}"
            )
        object.__setattr__(
            self, "rel_probability", tuple(float(p) for p in self.rel_probability)
        )

    @classmethod
    def from_dict(cls, data: Dict[str, object]) -> "Relation":
        """Build from a mapping as written by the classifier (``groundTruth`` accepted)."""
        ground_truth = data.get("ground_truth", data.get("groundTruth", UNKNOWN_GROUND_TRUTH))
        return cls(
            id_0=int(data["id_0"]),
            id_1=int(data["id_1"]),
            ground_truth=int(ground_truth),
            type=int(data.get("type", EDGE_TYPE_NEIGHBOR)),
            rel_probability=tuple(data["rel_probability"]),
        )

    def to_dict(self) -> Dict[str, object]:
        return {
            "id_0": self.id_0,
            "id_1": self.id_1,
            "ground_truth": self.ground_truth,
            "type": self.type,
            "rel_probability": list(self.rel_probability),
        }


@dataclass(frozen=True, slots=True)
class BuildResult:
    """Ordered edge list and its count, as returned by the builders."""

    edges: List[Edge] = field(default_factory=list)

    @property
    def num_edges(self) -> int:
        return len(self.edges)

    def __len__(self) -> int:
        return len(self.edges)

    def as_arrays(self) -> Dict[str, npt.NDArray]:
        """Column view of the edges: ``a``, ``b``, ``type`` (int64), ``w``, ``w2`` (float64)."""
        return {
            "a": np.fromiter((e.a for e in self.edges), dtype=np.int64, count=len(self.edges)),
            "b": np.fromiter((e.b for e in self.edges), dtype=np.int64, count=len(self.edges)),
            "type": np.fromiter(
                (e.type for e in self.edges), dtype=np.int64, count=len(self.edges)
            ),
            "w": np.fromiter((e.w for e in self.edges), dtype=np.float64, count=len(self.edges)),
            "w2": np.fromiter(
                (e.w2 for e in self.edges), dtype=np.float64, count=len(self.edges)
            ),
        }


__all__ = ["BuildResult", "Edge", "Relation"]
