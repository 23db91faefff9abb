"""Interval value type and the non-extrema post-processor."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence


@dataclass(frozen=True)
class Interval:
    """Inclusive interval between two x labels.

    Attributes
    ----------
    start: Any
        x label of the first point of the interval.
    end: Any
        x label of the last point of the interval.
    start_index: int | None
        Position of ``start`` in the scanned sequence, when known.
    end_index: int | None
        Position of ``end`` in the scanned sequence, when known.
    """

    start: Any
    end: Any
    start_index: Optional[int] = field(default=None, compare=False)
    end_index: Optional[int] = field(default=None, compare=False)

    def as_tuple(self) -> tuple[Any, Any]:
        return (self.start, self.end)

    @property
    def center_index(self) -> int:
        if self.start_index is None or self.end_index is None:
            raise ValueError("interval carries no index positions")
        return (self.start_index + self.end_index) // 2


def _ordered(start_index: Optional[int], end_index: Optional[int]) -> bool:
    # without positions the caller's order is taken as is
    return start_index is None or end_index is None or start_index <= end_index


def complement_intervals(extrema: Sequence[Interval], first: Interval, last: Interval) -> List[Interval]:
    """Return the intervals between and around ``extrema``.

    ``first`` and ``last`` are single-point intervals marking the domain
    bounds. Consecutive intervals share their boundary points, so the result
    together with ``extrema`` covers ``[first.start, last.end]``. Extrema that
    overlap leave no gap between them and contribute nothing.
    """

    if not extrema:
        return [Interval(first.start, last.end, first.start_index, last.end_index)]

    gaps: List[Interval] = []
    head = extrema[0]
    if first.start != head.start and _ordered(first.start_index, head.start_index):
        gaps.append(Interval(first.start, head.start, first.start_index, head.start_index))
    for prev, nxt in zip(extrema[:-1], extrema[1:]):
        if _ordered(prev.end_index, nxt.start_index):
            gaps.append(Interval(prev.end, nxt.start, prev.end_index, nxt.start_index))
    tail = extrema[-1]
    if tail.end != last.end and _ordered(tail.end_index, last.end_index):
        gaps.append(Interval(tail.end, last.end, tail.end_index, last.end_index))
    return gaps


def point(x: Any, idx: int) -> Interval:
    """Single-point interval at position ``idx`` labelled ``x``."""

    return Interval(x, x, idx, idx)


__all__ = ["Interval", "complement_intervals", "point"]
