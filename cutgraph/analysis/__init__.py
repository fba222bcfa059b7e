"""Batch entry points."""

from cutgraph.analysis.graph_runner import run_grid_graph, run_relation_graph

__all__ = ["run_grid_graph", "run_relation_graph"]
