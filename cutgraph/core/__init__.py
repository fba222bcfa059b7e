"""Core data types."""

from cutgraph.core.types import BuildResult, Edge, Relation

__all__ = ["BuildResult", "Edge", "Relation"]
