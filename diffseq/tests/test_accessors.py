import numpy as np
import pandas as pd
import pytest

from diffseq.accessors import (
    ArrayView,
    CallableView,
    ColumnsView,
    MappingView,
    PairsView,
    SeriesView,
    as_values,
    as_view,
)


def test_array_view_uses_indices():
    view = ArrayView([3, 1, 2])
    assert len(view) == 3
    assert view.at(1) == (1, 1.0)
    np.testing.assert_array_equal(view.values(), [3.0, 1.0, 2.0])


def test_array_view_rejects_2d():
    with pytest.raises(ValueError):
        ArrayView(np.zeros((2, 3)))


def test_columns_view():
    view = ColumnsView(["a", "b"], [1.5, 2.5])
    assert view.at(0) == ("a", 1.5)
    with pytest.raises(ValueError):
        ColumnsView([0, 1, 2], [1.0])


def test_pairs_and_mapping_views():
    pairs = PairsView([(10, 1.0), (20, 2.0)])
    assert pairs.at(1) == (20, 2.0)
    mapping = MappingView({"x": 4, "y": 5})
    assert len(mapping) == 2
    assert mapping.at(1) == ("y", 5.0)


def test_series_view():
    view = SeriesView(pd.Series([1, 2, 3], index=["a", "b", "c"]))
    assert view.at(2) == ("c", 3.0)
    np.testing.assert_array_equal(view.values(), [1.0, 2.0, 3.0])


def test_callable_view_defaults():
    view = CallableView([4, 5, 6])
    assert len(view) == 3
    assert view.at(2) == (2, 6.0)

    custom = CallableView({"v": [1, 2]}, get_y=lambda d, i: d["v"][i], get_length=lambda d: len(d["v"]))
    assert custom.at(1) == (1, 2.0)


def test_as_view():
    view = ArrayView([1, 2])
    assert as_view(view) is view
    assert isinstance(as_view([1, 2]), ArrayView)
    assert isinstance(as_view([1, 2], get_x=lambda d, i: i), CallableView)


def test_as_values():
    np.testing.assert_array_equal(as_values({"a": 1, "b": 2}), [1.0, 2.0])
    np.testing.assert_array_equal(as_values(pd.Series([3, 4])), [3.0, 4.0])
    np.testing.assert_array_equal(as_values(PairsView([(0, 5), (1, 6)])), [5.0, 6.0])
    with pytest.raises(ValueError):
        as_values([[1, 2], [3, 4]])


def test_array_backed_views_compare_by_identity():
    view = ArrayView(np.arange(3))
    assert view == view
    assert ArrayView(np.arange(3)) != ArrayView(np.arange(3))
    series = pd.Series([1.0, 2.0])
    assert SeriesView(series) != SeriesView(series)
    assert ColumnsView(np.arange(2), np.ones(2)) != ColumnsView(np.arange(2), np.ones(2))
