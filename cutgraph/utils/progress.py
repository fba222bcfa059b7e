# cutgraph/utils/progress.py
"""Progress bar for batch graph builds."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, TypeVar

from tqdm.auto import tqdm

from cutgraph.config import get_settings

T = TypeVar("T")


def track(
    iterable: Iterable[T],
    *,
    description: str | None = None,
    total: int | None = None,
    unit: str = "it",
    label: Callable[[T], str] | None = None,
) -> Iterator[T]:
    """Yield items under a tqdm bar; ``label`` names the current item in the postfix."""
    bar = tqdm(
        iterable,
        desc=description,
        total=total,
        unit=unit,
        leave=False,
        bar_format=get_settings().logging.progress_bar_format,
    )
    with bar:
        for item in bar:
            if label is not None:
                bar.set_postfix_str(label(item), refresh=False)
            yield item


__all__ = ["track"]
