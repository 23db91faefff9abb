"""Differentiation, integration and local extrema of numeric sequences.

The core is a linear-time, tolerance-based scan that reports local minima and
maxima as x intervals, robust to noise below a caller-chosen tolerance.
"""

from .accessors import (
    ArrayView,
    CallableView,
    ColumnsView,
    MappingView,
    PairsView,
    SequenceView,
    SeriesView,
    as_view,
)
from .calculus import InsufficientDataError, differentiate, differentiate_xy, integrate, integrate_xy
from .extrema import ExtremaResult, LocalExtrema, extremum_centers, local_extrema, local_extrema_xy
from .intervals import Interval, complement_intervals

__all__ = [
    "ArrayView",
    "CallableView",
    "ColumnsView",
    "MappingView",
    "PairsView",
    "SequenceView",
    "SeriesView",
    "as_view",
    "InsufficientDataError",
    "differentiate",
    "differentiate_xy",
    "integrate",
    "integrate_xy",
    "ExtremaResult",
    "LocalExtrema",
    "extremum_centers",
    "local_extrema",
    "local_extrema_xy",
    "Interval",
    "complement_intervals",
]
