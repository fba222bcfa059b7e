# cutgraph/utils/__init__.py
"""Utility package re-exporting shared helpers for cutgraph."""

from cutgraph.utils.error_tracker import ErrorTracker
from cutgraph.utils.io import (
    atomic_save_npz,
    ensure_directory,
    read_document,
    write_report,
)
from cutgraph.utils.logger import get_logger
from cutgraph.utils.progress import track

__all__ = [
    "ErrorTracker",
    "atomic_save_npz",
    "ensure_directory",
    "get_logger",
    "read_document",
    "track",
    "write_report",
]
