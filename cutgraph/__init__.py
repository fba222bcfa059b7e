# cutgraph/__init__.py
"""Weighted graph construction for min-cut segmentation of organized point clouds."""

from __future__ import annotations

from cutgraph.config import GraphConfig, Settings, get_settings, load_settings
from cutgraph.core.types import BuildResult, Edge, Relation
from cutgraph.graph.model import Graph
from cutgraph.vision.frame import OrganizedFrame

__all__ = [
    "BuildResult",
    "Edge",
    "Graph",
    "GraphConfig",
    "OrganizedFrame",
    "Relation",
    "Settings",
    "get_settings",
    "load_settings",
]
