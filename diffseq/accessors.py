"""Accessor layer for diffseq.

Every algorithm in the package reads its input through a :class:`SequenceView`
exposing ``len``, ``y(i)`` and ``x(i)``. The caller picks the adapter that
matches the shape of the data; nothing here inspects arbitrary objects to guess
their layout.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Hashable, Mapping, Optional, Sequence, Tuple

import numpy as np
import pandas as pd


class SequenceView:
    """Read-only view of a sequence of ``(x, y)`` points."""

    def __len__(self) -> int:
        raise NotImplementedError

    def y(self, idx: int) -> float:
        raise NotImplementedError

    def x(self, idx: int) -> Any:
        return idx

    def at(self, idx: int) -> Tuple[Any, float]:
        return self.x(idx), self.y(idx)

    def values(self) -> np.ndarray:
        """Return all y-values as a float array."""

        return np.asarray([self.y(i) for i in range(len(self))], dtype=float)


@dataclass(frozen=True, eq=False)
class ArrayView(SequenceView):
    """Plain indexable numeric sequence; x labels are the indices."""

    data: Sequence[float]
    _y: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        arr = np.asarray(self.data, dtype=float)
        if arr.ndim != 1:
            raise ValueError("ArrayView expects a 1D sequence")
        object.__setattr__(self, "_y", arr)

    def __len__(self) -> int:
        return self._y.shape[0]

    def y(self, idx: int) -> float:
        return float(self._y[idx])

    def values(self) -> np.ndarray:
        return self._y.copy()


@dataclass(frozen=True, eq=False)
class ColumnsView(SequenceView):
    """Parallel ``xs`` and ``ys`` sequences (struct of arrays)."""

    xs: Sequence[Any]
    ys: Sequence[float]

    def __post_init__(self) -> None:
        if len(self.xs) != len(self.ys):
            raise ValueError(f"xs and ys differ in length ({len(self.xs)} != {len(self.ys)})")

    def __len__(self) -> int:
        return len(self.ys)

    def y(self, idx: int) -> float:
        return float(self.ys[idx])

    def x(self, idx: int) -> Any:
        return self.xs[idx]


@dataclass(frozen=True)
class PairsView(SequenceView):
    """Sequence of ``(x, y)`` pairs (array of structs)."""

    pairs: Sequence[Tuple[Any, float]]

    def __len__(self) -> int:
        return len(self.pairs)

    def y(self, idx: int) -> float:
        return float(self.pairs[idx][1])

    def x(self, idx: int) -> Any:
        return self.pairs[idx][0]


@dataclass(frozen=True)
class MappingView(SequenceView):
    """Mapping of x label to y-value, in insertion order."""

    mapping: Mapping[Hashable, float]
    _keys: Tuple[Hashable, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_keys", tuple(self.mapping.keys()))

    def __len__(self) -> int:
        return len(self._keys)

    def y(self, idx: int) -> float:
        return float(self.mapping[self._keys[idx]])

    def x(self, idx: int) -> Any:
        return self._keys[idx]


@dataclass(frozen=True, eq=False)
class SeriesView(SequenceView):
    """``pandas.Series`` whose index labels serve as x labels."""

    series: pd.Series
    _y: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_y", self.series.to_numpy(dtype=float))

    def __len__(self) -> int:
        return self._y.shape[0]

    def y(self, idx: int) -> float:
        return float(self._y[idx])

    def x(self, idx: int) -> Any:
        return self.series.index[idx]

    def values(self) -> np.ndarray:
        return self._y.copy()


def _default_x(data: Any, idx: int) -> Any:
    return idx


def _default_y(data: Any, idx: int) -> float:
    return data[idx]


def _default_length(data: Any) -> int:
    return len(data)


@dataclass(frozen=True)
class CallableView(SequenceView):
    """View built from caller-supplied getter functions.

    Each getter is optional and falls back independently:
    ``get_x(data, i) -> i``, ``get_y(data, i) -> data[i]`` and
    ``get_length(data) -> len(data)``.
    """

    data: Any
    get_x: Optional[Callable[[Any, int], Any]] = None
    get_y: Optional[Callable[[Any, int], float]] = None
    get_length: Optional[Callable[[Any], int]] = None

    def __len__(self) -> int:
        return int((self.get_length or _default_length)(self.data))

    def y(self, idx: int) -> float:
        return float((self.get_y or _default_y)(self.data, idx))

    def x(self, idx: int) -> Any:
        return (self.get_x or _default_x)(self.data, idx)


def as_view(
    data: Any,
    get_x: Optional[Callable[[Any, int], Any]] = None,
    get_y: Optional[Callable[[Any, int], float]] = None,
    get_length: Optional[Callable[[Any], int]] = None,
) -> SequenceView:
    """Return a :class:`SequenceView` for ``data``.

    Views are passed through, any getter selects a :class:`CallableView`, and
    everything else is treated as a plain indexable sequence.
    """

    if isinstance(data, SequenceView):
        return data
    if get_x is not None or get_y is not None or get_length is not None:
        return CallableView(data, get_x=get_x, get_y=get_y, get_length=get_length)
    return ArrayView(data)


def as_values(data: Any) -> np.ndarray:
    """Normalize ``data`` into a 1D float array of y-values."""

    if isinstance(data, SequenceView):
        return data.values()
    if isinstance(data, pd.Series):
        return data.to_numpy(dtype=float)
    if isinstance(data, Mapping):
        return np.fromiter(data.values(), dtype=float, count=len(data))
    arr = np.asarray(data, dtype=float)
    if arr.ndim != 1:
        raise ValueError("expected a 1D sequence of values")
    return arr


__all__ = [
    "SequenceView",
    "ArrayView",
    "ColumnsView",
    "PairsView",
    "MappingView",
    "SeriesView",
    "CallableView",
    "as_view",
    "as_values",
]
