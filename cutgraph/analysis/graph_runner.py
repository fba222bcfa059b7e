# cutgraph/analysis/graph_runner.py
"""Graph building entry points for frame batches and relation files."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable

from cutgraph.config import (
    FILENAME_GRID_SUMMARY_JSON,
    FILENAME_RELATION_SUMMARY_JSON,
    GraphConfig,
    get_settings,
)
from cutgraph.graph.model import Graph
from cutgraph.graph.traversal import graph_summary
from cutgraph.utils.error_tracker import ErrorTracker
from cutgraph.utils.io import write_report
from cutgraph.utils.logger import get_logger
from cutgraph.utils.progress import track
from cutgraph.vision.io import load_frame, load_relations

LOGGER = get_logger(__name__)


def run_grid_graph(
    frame_paths: Iterable[Path],
    *,
    output_path: Path | None = None,
    config: GraphConfig | None = None,
) -> Path:
    """Build one lattice graph per ``.npz`` frame and write their summaries."""
    settings = get_settings()
    cfg = config or settings.graph
    tracker = ErrorTracker(context="cutgraph.grid")
    target = output_path or (settings.paths.saves_root / FILENAME_GRID_SUMMARY_JSON)
    paths = [Path(p) for p in frame_paths]
    report: Dict[str, Any] = {}
    for path in track(
        paths, description="grid graphs", total=len(paths), unit="frame", label=lambda p: p.name
    ):
        try:
            frame = load_frame(path)
            graph = Graph(config=cfg)
            graph.build_from_point_cloud(frame)
            summary = graph_summary(graph)
            summary["width"] = frame.width
            summary["height"] = frame.height
            report[path.name] = summary
        except Exception as exc:  # noqa: BLE001
            tracker.record(path.name, str(exc))
            raise
    write_report(target, report)
    tracker.summary()
    LOGGER.info("Grid graph summary saved to {}", target)
    return target


def run_relation_graph(
    node_count: int,
    relations_path: Path,
    *,
    output_path: Path | None = None,
    config: GraphConfig | None = None,
) -> Path:
    """Build the repaired relation graph and write its summary and edges."""
    settings = get_settings()
    cfg = config or settings.graph
    tracker = ErrorTracker(context="cutgraph.relations")
    target = output_path or (settings.paths.saves_root / FILENAME_RELATION_SUMMARY_JSON)
    try:
        graph = Graph(node_count, load_relations(Path(relations_path)), config=cfg)
        original = len(graph.relations)
        result = graph.build_from_relations()
        summary = graph_summary(graph)
        summary["repaired"] = [r.to_dict() for r in graph.relations[original:]]
        summary["edges"] = [[e.a, e.b, e.w] for e in result.edges]
    except Exception as exc:  # noqa: BLE001
        tracker.record("relations", str(exc))
        raise
    write_report(target, summary)
    tracker.summary()
    LOGGER.info("Relation graph summary saved to {}", target)
    return target


__all__ = ["run_grid_graph", "run_relation_graph"]
