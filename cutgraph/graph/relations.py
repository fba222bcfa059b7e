# cutgraph/graph/relations.py
"""Graph construction from classifier relations with connectivity repair."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from cutgraph.config import (
    DEFAULT_GRAPH_CONFIG,
    EDGE_TYPE_NEIGHBOR,
    GRAPH_REFERENCE_NODE,
    UNKNOWN_GROUND_TRUTH,
    GraphConfig,
)
from cutgraph.core.types import BuildResult, Edge, Relation
from cutgraph.utils.logger import get_logger

LOGGER = get_logger(__name__)


def validate_relations(node_count: int, relations: Sequence[Relation]) -> None:
    """Raise ValueError if a relation references a node outside ``[0, node_count)``."""
    bad = [
        (r.id_0, r.id_1)
        for r in relations
        if not (0 <= r.id_0 < node_count and 0 <= r.id_1 < node_count)
    ]
    if bad:
        raise ValueError(f"relations reference nodes outside [0, {node_count}): {bad[:3]}")


def repair_connectivity(
    node_count: int,
    relations: Sequence[Relation],
    *,
    config: GraphConfig | None = None,
) -> List[Relation]:
    """Return ``relations`` followed by one synthetic relation per unlinked node.

    A node ``i`` in ``[1, node_count)`` is linked only if some relation has
    ``id_0 == 0`` and ``id_1 == i``; reaching it through other nodes does not
    count. Repairs are appended in ascending node order.
    """
    validate_relations(node_count, relations)
    cfg = config or DEFAULT_GRAPH_CONFIG
    linked = {r.id_1 for r in relations if r.id_0 == GRAPH_REFERENCE_NODE}
    repaired = list(relations)
    for node in range(GRAPH_REFERENCE_NODE + 1, node_count):
        if node in linked:
            continue
        LOGGER.tag(
            "REPAIR",
            "node without relation, adding {}-{}",
            GRAPH_REFERENCE_NODE,
            node,
            level="warning",
        )
        repaired.append(
            Relation(
                id_0=GRAPH_REFERENCE_NODE,
                id_1=node,
                ground_truth=UNKNOWN_GROUND_TRUTH,
                type=EDGE_TYPE_NEIGHBOR,
                rel_probability=cfg.repair_probability,
            )
        )
    return repaired


def build_from_relations(
    node_count: int,
    relations: Sequence[Relation],
    *,
    config: GraphConfig | None = None,
) -> Tuple[List[Relation], BuildResult]:
    """Repair connectivity, then emit one edge per relation with ``w = P(connected)``."""
    LOGGER.debug("Number of nodes: {}", node_count)
    LOGGER.opt(lazy=True).debug(
        "Relations: {}", lambda: ", ".join(f"{r.id_0}-{r.id_1}" for r in relations)
    )

    repaired = repair_connectivity(node_count, relations, config=config)

    edges: List[Edge] = [
        Edge(a=r.id_0, b=r.id_1, type=EDGE_TYPE_NEIGHBOR, w=r.rel_probability[0])
        for r in repaired
    ]

    LOGGER.tag(
        "REL",
        "created {} edges from {} relations ({} repaired)",
        len(edges),
        len(repaired),
        len(repaired) - len(relations),
        level="debug",
    )
    return repaired, BuildResult(edges=edges)


__all__ = ["build_from_relations", "repair_connectivity", "validate_relations"]
