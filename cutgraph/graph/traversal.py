# cutgraph/graph/traversal.py
"""Graph traversal and summary utilities."""

from __future__ import annotations

from collections import deque
from typing import Any, Dict, List

import numpy as np

from cutgraph.graph.model import Graph
from cutgraph.utils.logger import get_logger

LOGGER = get_logger(__name__)


def connected_components(graph: Graph) -> List[List[int]]:
    adjacency = graph.adjacency()
    visited: set[int] = set()
    components: List[List[int]] = []
    for node in range(graph.node_count):
        if node in visited:
            continue
        queue = deque([node])
        component: List[int] = []
        while queue:
            current = queue.popleft()
            if current in visited:
                continue
            visited.add(current)
            component.append(current)
            for neighbour in adjacency[current]:
                if neighbour not in visited:
                    queue.append(neighbour)
        components.append(component)
    LOGGER.debug("Found {} connected components", len(components))
    return components


def _stats(values: np.ndarray) -> Dict[str, float]:
    if values.size == 0:
        return {"min": 0.0, "max": 0.0, "mean": 0.0}
    return {
        "min": float(values.min()),
        "max": float(values.max()),
        "mean": float(values.mean()),
    }


def graph_summary(graph: Graph) -> Dict[str, Any]:
    components = connected_components(graph)
    w = np.array([e.w for e in graph.edges], dtype=np.float64)
    w2 = np.array([e.w2 for e in graph.edges], dtype=np.float64)
    summary = {
        "node_count": graph.node_count,
        "edge_count": graph.num_edges,
        "relation_count": len(graph.relations),
        "component_sizes": sorted((len(c) for c in components), reverse=True),
        "w": _stats(w),
        "w2": _stats(w2),
    }
    LOGGER.info("Graph summary with {} components", len(components))
    return summary


__all__ = ["connected_components", "graph_summary"]
