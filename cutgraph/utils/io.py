# cutgraph/utils/io.py
"""Atomic writers for graph reports and frame archives, suffix-aware readers."""

from __future__ import annotations

import json
import tempfile
from pathlib import Path
from typing import IO, Any, Callable

import numpy as np
import yaml

from cutgraph.utils.logger import get_logger

LOGGER = get_logger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


def ensure_directory(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def _atomic_replace(path: Path, write: Callable[[IO], None], *, binary: bool = False) -> None:
    """Write through a temporary sibling file, then move it over ``path``."""
    ensure_directory(path.parent)
    mode = "wb" if binary else "w"
    encoding = None if binary else "utf-8"
    with tempfile.NamedTemporaryFile(
        mode, delete=False, dir=path.parent, suffix=path.suffix, encoding=encoding
    ) as tmp:
        write(tmp)
        tmp_path = Path(tmp.name)
    tmp_path.replace(path)
    LOGGER.debug("Wrote file {} atomically", path)


def _plain(value: Any) -> Any:
    """Numpy scalars and arrays in summaries become plain Python values."""
    if isinstance(value, dict):
        return {str(k): _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    if isinstance(value, np.ndarray):
        return value.tolist()
    if isinstance(value, np.generic):
        return value.item()
    return value


def write_report(path: Path, report: Any) -> Path:
    """Write a graph summary as YAML (``.yaml``/``.yml``) or JSON (anything else)."""
    path = Path(path)
    data = _plain(report)
    if path.suffix in YAML_SUFFIXES:
        _atomic_replace(path, lambda fh: yaml.safe_dump(data, fh, sort_keys=True))
    else:
        _atomic_replace(path, lambda fh: json.dump(data, fh, indent=2, sort_keys=True))
    return path


def read_document(path: Path) -> Any:
    """Load a YAML or JSON document, chosen by suffix."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"document not found: {path}")
    with path.open("r", encoding="utf-8") as handle:
        if path.suffix in YAML_SUFFIXES:
            return yaml.safe_load(handle)
        return json.load(handle)


def atomic_save_npz(path: Path, **arrays: np.ndarray) -> Path:
    """Store named arrays as a compressed ``.npz`` without leaving partial files."""
    path = Path(path)
    _atomic_replace(path, lambda fh: np.savez_compressed(fh, **arrays), binary=True)
    return path


__all__ = [
    "atomic_save_npz",
    "ensure_directory",
    "read_document",
    "write_report",
]
