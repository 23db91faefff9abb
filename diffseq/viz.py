"""Visualization utilities for diffseq."""

from __future__ import annotations

from typing import Any, Iterable, Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from .accessors import as_values
from .extrema import ExtremaResult
from .intervals import Interval

plt.rcParams.update({"figure.autolayout": True})


def _shade(ax: Axes, x: np.ndarray, intervals: Iterable[Interval], label: str, **style: Any) -> None:
    for n, iv in enumerate(intervals):
        lo, hi = x[iv.start_index], x[iv.end_index]
        kwargs = dict(style, label=label if n == 0 else None)
        if iv.start_index == iv.end_index:
            ax.axvline(lo, linestyle="--", color=kwargs.pop("color"), label=kwargs["label"])
        else:
            ax.axvspan(lo, hi, **kwargs)


def plot_extrema(
    values: Any,
    result: ExtremaResult,
    xs: Optional[Sequence[float]] = None,
    ax: Optional[Axes] = None,
    title: str | None = None,
) -> Figure:
    """Plot ``values`` with minima, maxima and plateaus highlighted.

    Intervals are placed by their index positions, so ``xs`` only sets the
    horizontal coordinates of the drawing. The figure is returned unsaved.
    """

    y = as_values(values)
    x = np.arange(y.shape[0]) if xs is None else np.asarray(xs)
    if x.shape != y.shape:
        raise ValueError("xs and values differ in length")

    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 4))
    else:
        fig = ax.figure

    ax.plot(x, y, color="C0", label="values")
    _shade(ax, x, result.minima, "minima", color="C2", alpha=0.3)
    _shade(ax, x, result.maxima, "maxima", color="C3", alpha=0.3)
    _shade(ax, x, result.plateaus, "plateaus", color="C7", alpha=0.2, hatch="//")
    ax.set_title(title or f"Local extrema ({len(result.minima)} min, {len(result.maxima)} max)")
    ax.legend()
    return fig


__all__ = ["plot_extrema"]
