"""Tolerance-based local extrema detection.

A single pass classifies the sequence into rising and falling runs. A run ends
only when a value leaves the ``y_tolerance`` band around the running extreme,
so noise smaller than the tolerance never produces spurious extrema. Every
extremum is reported as an inclusive interval of x labels rather than a single
point; flat stretches at the turning point are folded into that interval.

``minimize_intervals`` selects how wide the reported interval is: the tight
form keeps only the points within tolerance of the extreme value, the wide
form also includes the neighbouring point on either side.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

import pandas as pd

from .accessors import ColumnsView, SequenceView, as_view
from .intervals import Interval, complement_intervals, point

logger = logging.getLogger(__name__)

RISING = 1
FALLING = -1


@dataclass
class ExtremaResult:
    """Intervals found by :class:`LocalExtrema`.

    ``extrema`` is kept in domain order as minima and maxima are recorded.
    ``plateaus`` holds flat stretches inside a monotonic run; those are
    neither minima nor maxima and are not part of ``extrema``.
    ``nonextrema`` is ``None`` unless it was requested.
    """

    minima: List[Interval] = field(default_factory=list)
    maxima: List[Interval] = field(default_factory=list)
    plateaus: List[Interval] = field(default_factory=list)
    extrema: List[Interval] = field(default_factory=list)
    nonextrema: Optional[List[Interval]] = None

    def record_minimum(self, interval: Interval) -> None:
        logger.debug("minimum at %s", interval.as_tuple())
        self.minima.append(interval)
        self.extrema.append(interval)

    def record_maximum(self, interval: Interval) -> None:
        logger.debug("maximum at %s", interval.as_tuple())
        self.maxima.append(interval)
        self.extrema.append(interval)

    def record_plateau(self, interval: Interval) -> None:
        logger.debug("plateau at %s", interval.as_tuple())
        self.plateaus.append(interval)

    def as_dict(self) -> Dict[str, List[Tuple[Any, Any]]]:
        out = {
            "minima": [iv.as_tuple() for iv in self.minima],
            "maxima": [iv.as_tuple() for iv in self.maxima],
            "plateaus": [iv.as_tuple() for iv in self.plateaus],
            "extrema": [iv.as_tuple() for iv in self.extrema],
        }
        if self.nonextrema is not None:
            out["nonextrema"] = [iv.as_tuple() for iv in self.nonextrema]
        return out

    def to_frame(self) -> pd.DataFrame:
        """Return all intervals as a frame ordered by position."""

        rows = []
        for kind, items in (
            ("minimum", self.minima),
            ("maximum", self.maxima),
            ("plateau", self.plateaus),
            ("nonextremum", self.nonextrema or []),
        ):
            for iv in items:
                rows.append(
                    {
                        "kind": kind,
                        "start": iv.start,
                        "end": iv.end,
                        "start_index": iv.start_index,
                        "end_index": iv.end_index,
                    }
                )
        frame = pd.DataFrame(rows, columns=["kind", "start", "end", "start_index", "end_index"])
        return frame.sort_values(["start_index", "end_index"], kind="stable").reset_index(drop=True)


class LocalExtrema:
    """Locate local minima, maxima and plateaus of a noisy sequence."""

    def __init__(
        self,
        y_tolerance: float = 0.1,
        minimize_intervals: bool = True,
        nonextrema: bool = True,
    ) -> None:
        self.y_tolerance = float(y_tolerance)
        self.minimize_intervals = bool(minimize_intervals)
        self.nonextrema = bool(nonextrema)
        if self.y_tolerance <= 0:
            logger.warning("y_tolerance=%r is not positive; extrema will be degenerate", self.y_tolerance)

    def find(
        self,
        data: Any,
        get_x: Optional[Callable[[Any, int], Any]] = None,
        get_y: Optional[Callable[[Any, int], float]] = None,
        get_length: Optional[Callable[[Any], int]] = None,
    ) -> ExtremaResult:
        """Scan ``data`` and return the extrema intervals.

        ``data`` is a :class:`SequenceView` or anything :func:`as_view`
        accepts. Fewer than three points cannot contain a turning point and
        give an empty result.
        """

        view = as_view(data, get_x=get_x, get_y=get_y, get_length=get_length)
        n = len(view)
        result = ExtremaResult()
        if n < 3:
            logger.debug("need at least 3 points to locate extrema, got %d", n)
            if self.nonextrema:
                result.nonextrema = []
            return result

        self._scan(view, n, result)

        if self.nonextrema:
            result.nonextrema = complement_intervals(
                result.extrema,
                point(view.x(0), 0),
                point(view.x(n - 1), n - 1),
            )
        return result

    def _interval(self, view: SequenceView, start: int, end: int) -> Interval:
        return Interval(view.x(start), view.x(end), start, end)

    def _run_bounds(self, view: SequenceView, before: int, after: int) -> Interval:
        # before/after are the first points outside the band on either side
        if self.minimize_intervals and after - before >= 2:
            return self._interval(view, before + 1, after - 1)
        return self._interval(view, before, after)

    def _scan(self, view: SequenceView, n: int, result: ExtremaResult) -> None:
        tol = self.y_tolerance
        y = view.y

        last_min = last_max = y(0)
        slope: Optional[int] = None
        plateau_length = 0
        i = 2

        this_y = y(1)
        if this_y < last_max - tol:
            slope = FALLING
            last_min = this_y
        elif this_y > last_min + tol:
            slope = RISING
            last_max = this_y
        else:
            # opening plateau, seek to the first value outside the band of y(0)
            while i < n:
                this_y = y(i)
                if this_y < last_max - tol:
                    end = i - 1 if self.minimize_intervals else i
                    result.record_maximum(self._interval(view, 0, end))
                    slope = FALLING
                    last_min = this_y
                    break
                if this_y > last_min + tol:
                    end = i - 1 if self.minimize_intervals else i
                    result.record_minimum(self._interval(view, 0, end))
                    slope = RISING
                    last_max = this_y
                    break
                i += 1
            i += 1

        for idx in range(i, n):
            this_y = y(idx)
            if slope == RISING:
                if this_y >= last_max - tol:
                    if this_y < last_max + tol:
                        plateau_length += 1
                    else:
                        if plateau_length > 0:
                            result.record_plateau(self._interval(view, idx - plateau_length - 1, idx - 1))
                        plateau_length = 0
                    last_max = max(last_max, this_y)
                else:
                    plateau_length = 0
                    start = idx - 1
                    while y(start) >= last_max - tol:
                        start -= 1
                    result.record_maximum(self._run_bounds(view, start, idx))
                    slope = FALLING
                    last_min = this_y
            elif slope == FALLING:
                if this_y <= last_min + tol:
                    if this_y > last_min - tol:
                        plateau_length += 1
                    else:
                        if plateau_length > 0:
                            result.record_plateau(self._interval(view, idx - plateau_length - 1, idx - 1))
                        plateau_length = 0
                    last_min = min(last_min, this_y)
                else:
                    plateau_length = 0
                    start = idx - 1
                    while y(start) <= last_min + tol:
                        start -= 1
                    result.record_minimum(self._run_bounds(view, start, idx))
                    slope = RISING
                    last_max = this_y

        if plateau_length > 0:
            # trailing plateau; its bounds are already tight
            last = n - 1
            interval = self._interval(view, last - plateau_length, last)
            if y(last) > last_max - tol:
                result.record_maximum(interval)
            else:
                result.record_minimum(interval)


def local_extrema(
    data: Any,
    y_tolerance: float = 0.1,
    minimize_intervals: bool = True,
    nonextrema: bool = True,
    get_x: Optional[Callable[[Any, int], Any]] = None,
    get_y: Optional[Callable[[Any, int], float]] = None,
    get_length: Optional[Callable[[Any], int]] = None,
) -> ExtremaResult:
    """Convenience wrapper around :meth:`LocalExtrema.find`."""

    finder = LocalExtrema(
        y_tolerance=y_tolerance,
        minimize_intervals=minimize_intervals,
        nonextrema=nonextrema,
    )
    return finder.find(data, get_x=get_x, get_y=get_y, get_length=get_length)


def local_extrema_xy(
    xs: Sequence[Any],
    ys: Sequence[float],
    y_tolerance: float = 0.1,
    minimize_intervals: bool = True,
) -> ExtremaResult:
    """Extrema of ``ys`` labelled by the parallel sequence ``xs``."""

    finder = LocalExtrema(y_tolerance=y_tolerance, minimize_intervals=minimize_intervals, nonextrema=False)
    return finder.find(ColumnsView(xs, ys))


def extremum_centers(data: Any, y_tolerance: float = 0.1, **getters: Any) -> Tuple[List[Any], List[Any]]:
    """Return one x label per minimum and per maximum.

    Each label sits at the middle position of its extremum interval, which
    turns the interval output into point estimates.
    """

    view = as_view(data, **getters)
    result = LocalExtrema(y_tolerance=y_tolerance, nonextrema=False).find(view)
    minima = [view.x(iv.center_index) for iv in result.minima]
    maxima = [view.x(iv.center_index) for iv in result.maxima]
    return minima, maxima


__all__ = [
    "ExtremaResult",
    "LocalExtrema",
    "local_extrema",
    "local_extrema_xy",
    "extremum_centers",
    "RISING",
    "FALLING",
]
