import numpy as np
import pytest
from hypothesis import given, strategies as st

from diffseq.calculus import (
    InsufficientDataError,
    differentiate,
    differentiate_xy,
    integrate,
    integrate_xy,
)


def test_differentiate_unit_steps():
    np.testing.assert_allclose(differentiate([1, 4, 9, 16]), [3, 5, 7])
    np.testing.assert_allclose(differentiate([1, 4, 9, 16], 2), [2, 2])
    np.testing.assert_allclose(differentiate([1, 4, 9, 16], 3), [0])


def test_differentiate_mapping_uses_value_order():
    np.testing.assert_allclose(differentiate({"a": 1, "b": 3, "c": 6}), [2, 3])


def test_differentiate_xy_divided_differences():
    np.testing.assert_allclose(differentiate_xy([0, 1, 3], [0, 2, 6]), [2, 2])


def test_differentiate_xy_higher_order_drops_last_x():
    xs = [0, 1, 3, 6]
    ys = [0, 1, 9, 36]
    np.testing.assert_allclose(differentiate_xy(xs, ys, 2), [3.0, 2.5])


def test_differentiate_rejects_bad_input():
    with pytest.raises(InsufficientDataError):
        differentiate([1, 2, 3], 3)
    with pytest.raises(InsufficientDataError):
        differentiate([1])
    with pytest.raises(ValueError):
        differentiate([1, 2, 3], 0)
    with pytest.raises(ValueError):
        differentiate_xy([0, 1, 1], [1, 2, 3])
    with pytest.raises(ValueError):
        differentiate_xy([0, 1], [1, 2, 3])


def test_insufficient_data_is_a_value_error():
    assert issubclass(InsufficientDataError, ValueError)


def test_integrate_unit_steps():
    np.testing.assert_allclose(integrate([1, 2, 3]), [-6, -5, -3])


def test_integrate_xy_scales_by_step():
    np.testing.assert_allclose(integrate_xy([0, 2, 4], [1, 1, 1]), [-6, -4, -2])


def test_integrate_higher_order():
    np.testing.assert_allclose(integrate([1, 1, 1], 2), [6, 3, 1])


def test_integrate_rejects_bad_input():
    with pytest.raises(InsufficientDataError):
        integrate([1.0])
    with pytest.raises(InsufficientDataError):
        integrate([])
    with pytest.raises(ValueError):
        integrate([1, 2], 0)
    with pytest.raises(ValueError):
        integrate_xy([0, 0, 1], [1, 2, 3])


def test_integrate_differentiate_recovers_shape():
    v = np.array([3.0, 1.0, 4.0, 1.0, 5.0, 9.0, 2.0, 6.0])
    np.testing.assert_allclose(integrate(differentiate(v)), v[:-1] - v[-1])


def finite():
    return st.floats(min_value=-100, max_value=100, allow_nan=False, allow_infinity=False)


@given(st.lists(finite(), min_size=1, max_size=30), st.integers(min_value=1, max_value=5))
def test_differentiate_shortens_by_order(values, order):
    if order >= len(values):
        with pytest.raises(InsufficientDataError):
            differentiate(values, order)
    else:
        assert differentiate(values, order).shape == (len(values) - order,)


@given(
    st.lists(st.floats(min_value=0.1, max_value=10), min_size=2, max_size=30).flatmap(
        lambda steps: st.tuples(
            st.just(np.cumsum(steps)),
            st.lists(finite(), min_size=len(steps), max_size=len(steps)),
        )
    )
)
def test_integral_differences_match_scaled_values(xy):
    xs, ys = xy
    ys = np.asarray(ys)
    out = integrate_xy(xs, ys)
    assert out.shape == ys.shape
    np.testing.assert_allclose(np.diff(out), ys[:-1] * np.diff(xs), rtol=1e-9, atol=1e-6)
