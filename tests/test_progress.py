# tests/test_progress.py
"""Tests for the batch progress bar."""

from __future__ import annotations

from pathlib import Path

from cutgraph.utils import progress


class _RecordingBar:
    def __init__(self, iterable, **kwargs) -> None:
        self.iterable = iterable
        self.kwargs = kwargs
        self.postfixes: list[str] = []
        self.closed = False

    def __iter__(self):
        return iter(self.iterable)

    def __enter__(self):
        return self

    def __exit__(self, *exc) -> None:
        self.closed = True

    def set_postfix_str(self, text: str, refresh: bool = True) -> None:
        self.postfixes.append(text)


def test_track_labels_each_item(monkeypatch) -> None:
    bars: list[_RecordingBar] = []

    def fake_tqdm(iterable, **kwargs):
        bars.append(_RecordingBar(iterable, **kwargs))
        return bars[-1]

    monkeypatch.setattr(progress, "tqdm", fake_tqdm)
    paths = [Path("a.npz"), Path("b.npz")]
    seen = list(
        progress.track(paths, description="grid graphs", total=2, unit="frame", label=lambda p: p.name)
    )

    assert seen == paths
    (bar,) = bars
    assert bar.kwargs["unit"] == "frame"
    assert bar.kwargs["desc"] == "grid graphs"
    assert bar.postfixes == ["a.npz", "b.npz"]
    assert bar.closed


def test_track_without_label_passes_items_through() -> None:
    assert list(progress.track(range(3))) == [0, 1, 2]
