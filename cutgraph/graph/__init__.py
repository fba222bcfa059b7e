"""Weighted graph construction for min-cut segmentation."""

from cutgraph.graph.weights import (
    color_distance,
    depth_continuous,
    normal_angle,
    normalize_color_distance,
)
from cutgraph.graph.grid import build_from_point_cloud
from cutgraph.graph.relations import (
    build_from_relations,
    repair_connectivity,
    validate_relations,
)
from cutgraph.graph.model import Graph
from cutgraph.graph.traversal import connected_components, graph_summary

__all__ = [
    "Graph",
    "build_from_point_cloud",
    "build_from_relations",
    "color_distance",
    "connected_components",
    "depth_continuous",
    "graph_summary",
    "normal_angle",
    "normalize_color_distance",
    "repair_connectivity",
    "validate_relations",
]
