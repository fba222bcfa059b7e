# cutgraph/utils/error_tracker.py
"""Centralised error tracking utility for batch runners."""

from __future__ import annotations

from dataclasses import dataclass, field

from cutgraph.utils.logger import get_logger


@dataclass(slots=True)
class ErrorTracker:
    """Collect failures and contextual information during a batch run."""

    context: str = "ErrorTracker"
    errors: dict[str, list[str]] = field(default_factory=dict)

    def record(self, key: str, message: str) -> None:
        logger = get_logger(self.context)
        logger.error("{}: {}", key, message)
        self.errors.setdefault(key, []).append(message)

    def summary(self) -> dict[str, list[str]]:
        logger = get_logger(self.context)
        if not self.errors:
            logger.debug("No errors recorded")
            return {}
        for key, messages in self.errors.items():
            logger.warning("Encountered {} issues for {}", len(messages), key)
        return dict(self.errors)

    def __bool__(self) -> bool:
        return bool(self.errors)


__all__ = ["ErrorTracker"]
