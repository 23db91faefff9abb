"""Finite differences and reverse cumulative sums.

``differentiate`` and ``integrate`` assume unit spacing; the ``_xy`` variants
take explicit x-coordinates. Integration is indefinite: it recovers the shape
of a differentiated sequence up to an additive constant, so
``integrate(differentiate(v))`` equals ``v[:-1] - v[-1]`` rather than ``v``.
"""

from __future__ import annotations

from typing import Any, Tuple

import numpy as np

from .accessors import as_values


class InsufficientDataError(ValueError):
    """Raised when a sequence is too short for the requested operation."""


def _check_order(order: int) -> int:
    order = int(order)
    if order < 1:
        raise ValueError(f"order must be at least 1, got {order}")
    return order


def _prepare_xy(xs: Any, ys: Any) -> Tuple[np.ndarray, np.ndarray]:
    x = as_values(xs)
    y = as_values(ys)
    if x.shape != y.shape:
        raise ValueError(f"xs and ys differ in length ({x.shape[0]} != {y.shape[0]})")
    return x, y


def _steps(x: np.ndarray) -> np.ndarray:
    dx = np.diff(x)
    if np.any(dx == 0):
        raise ValueError("consecutive x values must differ")
    return dx


def differentiate(values: Any, order: int = 1) -> np.ndarray:
    """Return ``y[i+1] - y[i]``, applied ``order`` times."""

    y = as_values(values)
    return differentiate_xy(np.arange(y.shape[0], dtype=float), y, order)


def differentiate_xy(xs: Any, ys: Any, order: int = 1) -> np.ndarray:
    """Approximate the ``order``-th derivative of ``ys`` over ``xs``.

    Each step takes the divided differences
    ``(y[i+1] - y[i]) / (x[i+1] - x[i])`` and drops the last x-coordinate, so
    the result is ``order`` elements shorter than the input.
    """

    order = _check_order(order)
    x, y = _prepare_xy(xs, ys)
    n = y.shape[0]
    if n < order + 1:
        raise InsufficientDataError(f"order {order} differences need at least {order + 1} points, got {n}")
    for _ in range(order):
        y = np.diff(y) / _steps(x)
        x = x[:-1]
    return y


def _integrate_once(x: np.ndarray, y: np.ndarray) -> np.ndarray:
    dx = _steps(x)
    # the step after the last point is assumed equal to the last observed one
    dx = np.append(dx, dx[-1])
    return -np.cumsum((y * dx)[::-1])[::-1]


def integrate(values: Any, order: int = 1) -> np.ndarray:
    """Reverse cumulative sum of ``values`` with unit spacing."""

    y = as_values(values)
    return integrate_xy(np.arange(y.shape[0], dtype=float), y, order)


def integrate_xy(xs: Any, ys: Any, order: int = 1) -> np.ndarray:
    """Approximate the ``order``-th indefinite integral of ``ys`` over ``xs``.

    The result has the same length as the input and satisfies
    ``out[k+1] - out[k] == ys[k] * (xs[k+1] - xs[k])``. The missing value after
    the last point is taken as zero, which pins the last element to
    ``-ys[-1] * (xs[-1] - xs[-2])``.
    """

    order = _check_order(order)
    x, y = _prepare_xy(xs, ys)
    n = y.shape[0]
    if n < 2:
        raise InsufficientDataError(f"integration needs at least 2 points, got {n}")
    for _ in range(order):
        y = _integrate_once(x, y)
    return y


__all__ = [
    "InsufficientDataError",
    "differentiate",
    "differentiate_xy",
    "integrate",
    "integrate_xy",
]
