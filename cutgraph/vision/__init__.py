"""Organized frame model and frame/relation loading."""

from cutgraph.vision.frame import OrganizedFrame
from cutgraph.vision.io import (
    frame_from_open3d,
    load_frame,
    load_relations,
    read_organized_cloud,
    save_frame,
)

__all__ = [
    "OrganizedFrame",
    "frame_from_open3d",
    "load_frame",
    "load_relations",
    "read_organized_cloud",
    "save_frame",
]
