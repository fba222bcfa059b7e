# cutgraph/utils/logger.py
"""Logging helpers built on top of loguru."""

from __future__ import annotations

import inspect
import sys
from datetime import datetime
from pathlib import Path

from loguru import logger as _logger
from loguru._logger import Logger as LoguruLogger

from cutgraph.config import LoggingConfig, get_settings

_is_configured = False
_log_file: Path | None = None


def _configure(cfg: LoggingConfig) -> None:
    """Install the console sink and, if a directory is configured, a file sink."""
    global _is_configured, _log_file
    _logger.remove()
    _logger.configure(extra={"module": "cutgraph"})
    _logger.add(sys.stderr, level=cfg.level, format=cfg.console_format)
    _log_file = None
    if cfg.log_dir is not None:
        cfg.log_dir.mkdir(parents=True, exist_ok=True)
        ts = datetime.now().strftime("%Y%m%d_%H%M%S")
        _log_file = cfg.log_dir / f"cutgraph_{ts}.log"
        _logger.add(_log_file, level=cfg.level, format=cfg.file_format)
    _is_configured = True


def configure(cfg: LoggingConfig | None = None) -> None:
    """Manually (re)configure the sinks, e.g. after loading a settings file."""
    _configure(cfg or get_settings().logging)


def log_file() -> Path | None:
    return _log_file


def get_logger(name: str | None = None) -> LoguruLogger:
    """
    Return a configured loguru logger bound to a module name.

    If ``name`` is None, it's auto-detected from the caller module,
    e.g. "cutgraph.graph.grid" for cutgraph/graph/grid.py.
    """
    if not _is_configured:
        _configure(get_settings().logging)

    if name is None:
        frame = inspect.stack()[1]
        module = inspect.getmodule(frame[0])
        if module and module.__name__ != "__main__":
            name = module.__name__
        else:
            name = Path(frame.filename).stem

    logger = _logger.bind(module=name)

    def _tag(tag: str, msg: str, *args, level: str = "info") -> None:
        """
        Tagged logging: logger.tag("GRID", "built {} edges", n, level="debug").
        """
        caller = logger.opt(depth=1)
        method = getattr(caller, level, caller.info)
        method(f"[{tag}] {msg}", *args)

    setattr(logger, "tag", _tag)
    return logger


__all__ = ["configure", "get_logger", "log_file"]
