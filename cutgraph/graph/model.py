# cutgraph/graph/model.py
"""Graph container handed read-only to the min-cut solver."""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from cutgraph.config import GraphConfig
from cutgraph.core.types import BuildResult, Edge, Relation
from cutgraph.graph import grid, relations as relation_builder
from cutgraph.utils.logger import get_logger
from cutgraph.vision.frame import OrganizedFrame

LOGGER = get_logger(__name__)


class Graph:
    """Node count, relations and edges of one segmentation graph.

    A graph is populated exactly once, by either :meth:`build_from_point_cloud`
    or :meth:`build_from_relations`; afterwards it is read-only.
    """

    def __init__(
        self,
        node_count: int = 0,
        relations: Iterable[Relation] = (),
        *,
        config: Optional[GraphConfig] = None,
    ) -> None:
        if node_count < 0:
            raise ValueError(f"node_count must be >= 0, got {node_count}")
        rels = tuple(relations)
        relation_builder.validate_relations(node_count, rels)
        self._node_count = node_count
        self._relations: Tuple[Relation, ...] = rels
        self._edges: Tuple[Edge, ...] = ()
        self._built = False
        self._config = config

    @property
    def node_count(self) -> int:
        return self._node_count

    @property
    def relations(self) -> Tuple[Relation, ...]:
        return self._relations

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return self._edges

    @property
    def num_edges(self) -> int:
        return len(self._edges)

    @property
    def is_built(self) -> bool:
        return self._built

    def _ensure_empty(self) -> None:
        if self._built:
            raise RuntimeError("graph is already populated")

    def build_from_point_cloud(self, frame: OrganizedFrame) -> BuildResult:
        """Populate from an organized frame; node ids are row-major pixel indices."""
        self._ensure_empty()
        result = grid.build_from_point_cloud(frame, config=self._config)
        self._node_count = frame.size
        self._edges = tuple(result.edges)
        self._built = True
        LOGGER.info("Grid graph: {} nodes, {} edges", self._node_count, result.num_edges)
        return result

    def build_from_relations(self) -> BuildResult:
        """Populate from the classifier relations, repairing connectivity to node 0."""
        self._ensure_empty()
        repaired, result = relation_builder.build_from_relations(
            self._node_count, self._relations, config=self._config
        )
        self._relations = tuple(repaired)
        self._edges = tuple(result.edges)
        self._built = True
        LOGGER.info("Relation graph: {} nodes, {} edges", self._node_count, result.num_edges)
        return result

    def adjacency(self) -> List[List[int]]:
        """Neighbor lists per node, built from the edges."""
        adj: List[List[int]] = [[] for _ in range(self._node_count)]
        for e in self._edges:
            adj[e.a].append(e.b)
            adj[e.b].append(e.a)
        return adj

    def __repr__(self) -> str:
        return (
            f"Graph(node_count={self._node_count}, relations={len(self._relations)}, "
            f"edges={len(self._edges)})"
        )


__all__ = ["Graph"]
