# tests/test_logger.py
"""Tests for loguru sink setup and the error tracker."""

from __future__ import annotations

from pathlib import Path

from cutgraph.config import LoggingConfig
from cutgraph.utils.error_tracker import ErrorTracker
from cutgraph.utils.logger import configure, get_logger, log_file


def test_file_sink_is_optional(tmp_path: Path) -> None:
    try:
        configure(LoggingConfig(level="DEBUG", log_dir=tmp_path / "logs"))
        path = log_file()
        assert path is not None
        assert path.parent == tmp_path / "logs"
        assert path.exists()
    finally:
        configure(LoggingConfig())
    assert log_file() is None


def test_logger_has_tag_helper() -> None:
    logger = get_logger("tests.logger")
    assert callable(logger.tag)
    logger.tag("TEST", "tagged {} message", 1, level="debug")


def test_error_tracker_collects_messages() -> None:
    tracker = ErrorTracker(context="tests")
    assert not tracker
    assert tracker.summary() == {}
    tracker.record("frame_000.npz", "boom")
    tracker.record("frame_000.npz", "again")
    assert tracker
    assert tracker.summary() == {"frame_000.npz": ["boom", "again"]}
