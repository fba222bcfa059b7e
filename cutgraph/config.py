# cutgraph/config.py
"""Centralized configuration for graph construction.

All constants, settings, and configuration dataclasses are defined here.
Modules should import from this single source of truth.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import Any, Final, Mapping, Optional, Tuple

import yaml

# ============================================================================
# PROJECT PATHS
# ============================================================================

BASE_DIR: Final[Path] = Path(__file__).resolve().parent.parent


def _env_path(key: str, default: Optional[Path]) -> Optional[Path]:
    """Resolve path from environment variable with fallback."""
    value = os.getenv(key)
    return Path(value).expanduser() if value else default


def _env_str(key: str, default: str) -> str:
    """Resolve string from environment variable with fallback."""
    value = os.getenv(key)
    return value if value is not None else default


def _env_float(key: str, default: float) -> float:
    """Resolve float from environment variable with fallback."""
    value = os.getenv(key)
    return float(value) if value is not None else default


def _env_bool(key: str, default: bool) -> bool:
    value = os.getenv(key)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# ============================================================================
# GRAPH CONSTANTS
# ============================================================================

# Edge provenance tag for lattice neighbors and classifier relations.
EDGE_TYPE_NEIGHBOR: Final[int] = 1

# 8-bit color channels are scaled to [0, 1] before distances are taken.
COLOR_SCALE: Final[float] = 255.0

# A neighbor pair is kept only if |z_p - z_q| < ratio * z_p.
GRAPH_DEPTH_RATIO: Final[float] = 0.01

# Angle (rad) used when the normal angle is undefined, roughly pi / 2.
GRAPH_ANGLE_FALLBACK: Final[float] = 1.57

# Weight used for every pair when the frame has no color variance.
GRAPH_ZERO_VARIANCE_WEIGHT: Final[float] = 0.0

# Raw distance and weight of the first-column down-left pair.
GRAPH_FIRST_COLUMN_WEIGHT: Final[float] = 1.0

# [P(connected), P(separated)] of relations added by connectivity repair.
GRAPH_REPAIR_PROBABILITY: Final[Tuple[float, float]] = (1.0, 0.0)

# Id of the reference node every relation-mode node must touch directly.
GRAPH_REFERENCE_NODE: Final[int] = 0

UNKNOWN_GROUND_TRUTH: Final[int] = -1

# ============================================================================
# FILE NAMING CONSTANTS
# ============================================================================

FILENAME_GRID_SUMMARY_JSON: Final[str] = "grid_graph.json"
FILENAME_RELATION_SUMMARY_JSON: Final[str] = "relation_graph.json"
FRAME_NPZ_KEYS: Final[Tuple[str, ...]] = ("points", "colors", "normals")

# ============================================================================
# ENUMS
# ============================================================================


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


# ============================================================================
# DATACLASSES - Configuration Sections
# ============================================================================


@dataclass(frozen=True)
class GraphConfig:
    """Weights, gating and repair parameters of both graph builders."""

    depth_ratio: float = GRAPH_DEPTH_RATIO
    angle_fallback: float = GRAPH_ANGLE_FALLBACK
    zero_variance_weight: float = GRAPH_ZERO_VARIANCE_WEIGHT
    first_column_weight: float = GRAPH_FIRST_COLUMN_WEIGHT
    repair_probability: Tuple[float, float] = GRAPH_REPAIR_PROBABILITY
    link_first_column: bool = True

    def __post_init__(self) -> None:
        if self.depth_ratio <= 0:
            raise ValueError(f"depth_ratio must be positive, got {self.depth_ratio}")
        if len(self.repair_probability) != 2:
            raise ValueError(
                f"repair_probability must have 2 entries, got {len(self.repair_probability)}"
            )


@dataclass(frozen=True)
class LoggingConfig:
    """Logging sinks and level."""

    level: str = LogLevel.INFO.value
    log_dir: Optional[Path] = None
    console_format: str = (
        "<green>{time:MM-DD HH:mm:ss}</green>"
        "[<level>{level:.3}</level>]"
        "[<cyan>{extra[module]:.24}</cyan>:<cyan>{line:<3}</cyan>]"
        "<level>{message}</level>"
    )
    file_format: str = "{time:YYYY-MM-DD HH:mm:ss}[{level}][{extra[module]}:{line}]{message}"
    progress_bar_format: str = "{l_bar}{bar}| {n_fmt}/{total_fmt} [{elapsed}<{remaining}]"


@dataclass(frozen=True)
class PathsConfig:
    """File system paths configuration."""

    data_root: Path
    saves_root: Path


# ============================================================================
# MAIN CONFIGURATION
# ============================================================================


@dataclass(frozen=True)
class Settings:
    """Main application configuration.

    Instances are immutable (frozen=True) to prevent accidental mutation.
    """

    paths: PathsConfig
    graph: GraphConfig = field(default_factory=GraphConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_settings() -> Settings:
    """Factory function to create Settings with environment variable overrides.

    Environment variables:
        CUTGRAPH_DATA_ROOT: Base data directory
        CUTGRAPH_SAVES_ROOT: Output directory for runner summaries
        CUTGRAPH_LOG_LEVEL: Logging level
        CUTGRAPH_LOG_DIR: Directory for the log file sink (off when unset)
        CUTGRAPH_DEPTH_RATIO: Depth gating ratio
        CUTGRAPH_ANGLE_FALLBACK: Fallback normal angle in radians
        CUTGRAPH_LINK_FIRST_COLUMN: Emit the first-column down-left pair
    """
    data_root = _env_path("CUTGRAPH_DATA_ROOT", BASE_DIR / "data")
    saves_root = _env_path("CUTGRAPH_SAVES_ROOT", data_root / "saves")

    graph = GraphConfig(
        depth_ratio=_env_float("CUTGRAPH_DEPTH_RATIO", GRAPH_DEPTH_RATIO),
        angle_fallback=_env_float("CUTGRAPH_ANGLE_FALLBACK", GRAPH_ANGLE_FALLBACK),
        link_first_column=_env_bool("CUTGRAPH_LINK_FIRST_COLUMN", True),
    )
    logging = LoggingConfig(
        level=_env_str("CUTGRAPH_LOG_LEVEL", LogLevel.INFO.value).upper(),
        log_dir=_env_path("CUTGRAPH_LOG_DIR", None),
    )
    return Settings(
        paths=PathsConfig(data_root=data_root, saves_root=saves_root),
        graph=graph,
        logging=logging,
    )


def _overlay(section: Any, values: Mapping[str, Any] | None) -> Any:
    if not values:
        return section
    unknown = set(values) - set(section.__dataclass_fields__)
    if unknown:
        raise ValueError(f"unknown {type(section).__name__} keys: {sorted(unknown)}")
    coerced = dict(values)
    if "repair_probability" in coerced:
        coerced["repair_probability"] = tuple(float(p) for p in coerced["repair_probability"])
    if "log_dir" in coerced and coerced["log_dir"] is not None:
        coerced["log_dir"] = Path(coerced["log_dir"]).expanduser()
    return replace(section, **coerced)


def load_settings(path: Path) -> Settings:
    """Read a YAML file with optional ``graph`` and ``logging`` sections.

    Values not present in the file keep their environment/default values.
    """
    with Path(path).open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ValueError(f"settings file {path} must contain a mapping")
    base = get_settings()
    return replace(
        base,
        graph=_overlay(base.graph, data.get("graph")),
        logging=_overlay(base.logging, data.get("logging")),
    )


DEFAULT_GRAPH_CONFIG = GraphConfig()

__all__ = [
    "BASE_DIR",
    "COLOR_SCALE",
    "DEFAULT_GRAPH_CONFIG",
    "EDGE_TYPE_NEIGHBOR",
    "FILENAME_GRID_SUMMARY_JSON",
    "FILENAME_RELATION_SUMMARY_JSON",
    "FRAME_NPZ_KEYS",
    "GRAPH_ANGLE_FALLBACK",
    "GRAPH_DEPTH_RATIO",
    "GRAPH_FIRST_COLUMN_WEIGHT",
    "GRAPH_REFERENCE_NODE",
    "GRAPH_REPAIR_PROBABILITY",
    "GRAPH_ZERO_VARIANCE_WEIGHT",
    "GraphConfig",
    "LogLevel",
    "LoggingConfig",
    "PathsConfig",
    "Settings",
    "UNKNOWN_GROUND_TRUTH",
    "get_settings",
    "load_settings",
]
