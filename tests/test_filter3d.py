import itertools
import numpy as np
from pytest import raises

from causalfilt import LagTable, ConstantCoefficients, ArrayCoefficients, AliasingError
from causalfilt.filter3d import apply, apply_transpose, apply_inverse, apply_inverse_transpose
from causalfilt.utils import dot

from tests.util import (
    assert_almost_equal, random_field, local_coefficients, RecordingCoefficients,
    reference_apply, reference_matrix,
)

LAGS = LagTable(
    [0, 1, 2, -1, 0, 1, -1, 0, 1, 0],
    [0, 0, 0, 1, 1, 1, -1, -1, 0, 1],
    [0, 0, 0, 0, 0, 0, 1, 1, 1, 1])

def _coefficients(shape, seed):
    return ArrayCoefficients(local_coefficients(shape, LAGS.m, seed))

def test_matches_reference():
    for shape in [(4, 5, 6), (1, 1, 1), (2, 2, 2), (3, 1, 4), (2, 4, 1)]:
        a = _coefficients(shape, 1)
        x = random_field(shape, 2)
        y = apply(LAGS, a, x, np.zeros_like(x))
        assert_almost_equal(y, reference_apply(LAGS, a, x), 1e-12)

def test_operators_match_dense_matrix():
    shape = (3, 3, 4)
    a = _coefficients(shape, 3)
    M = reference_matrix(LAGS, a, shape)
    x = random_field(shape, 4)
    xv = x.ravel()
    assert_almost_equal(
        apply_transpose(LAGS, a, x, np.zeros_like(x)).ravel(), M.T.dot(xv), 1e-12)
    assert_almost_equal(
        apply_inverse(LAGS, a, x, np.zeros_like(x)).ravel(), np.linalg.solve(M, xv), 1e-10)
    assert_almost_equal(
        apply_inverse_transpose(LAGS, a, x, np.zeros_like(x)).ravel(),
        np.linalg.solve(M.T, xv), 1e-10)

def test_round_trips():
    shape = (5, 6, 7)
    a = _coefficients(shape, 5)
    x = random_field(shape, 6)
    y = apply(LAGS, a, x, np.zeros_like(x))
    assert_almost_equal(apply_inverse(LAGS, a, y, np.zeros_like(y)), x, 1e-12)
    y = apply_transpose(LAGS, a, x, np.zeros_like(x))
    assert_almost_equal(apply_inverse_transpose(LAGS, a, y, np.zeros_like(y)), x, 1e-12)

def test_dot_products():
    shape = (4, 5, 6)
    a = _coefficients(shape, 7)
    x = random_field(shape, 8)
    y = random_field(shape, 9)
    ax = apply(LAGS, a, x, np.zeros_like(x))
    aty = apply_transpose(LAGS, a, y, np.zeros_like(y))
    assert abs(dot(ax, y) - dot(x, aty)) < 1e-10
    bx = apply_inverse(LAGS, a, x, np.zeros_like(x))
    bty = apply_inverse_transpose(LAGS, a, y, np.zeros_like(y))
    assert abs(dot(bx, y) - dot(x, bty)) < 1e-10

def test_in_place():
    shape = (4, 4, 5)
    a = _coefficients(shape, 10)
    x = random_field(shape, 11)
    for op in (apply, apply_transpose, apply_inverse):
        expected = op(LAGS, a, x, np.zeros_like(x))
        y = x.copy()
        op(LAGS, a, y, y)
        assert_almost_equal(y, expected, 0)

def test_inverse_transpose_rejects_aliasing():
    x = random_field((3, 3, 3), 12)
    original = x.copy()
    with raises(AliasingError):
        apply_inverse_transpose(LAGS, ConstantCoefficients(np.ones(LAGS.m)), x, x)
    assert np.all(x == original)

def test_call_order():
    shape = (2, 3, 4)
    ascending = [(i1, i2, i3) for i3, i2, i1 in itertools.product(*[range(n) for n in shape])]
    for op, expected in ((apply, ascending[::-1]),
                         (apply_transpose, ascending),
                         (apply_inverse, ascending),
                         (apply_inverse_transpose, ascending[::-1])):
        a = RecordingCoefficients(ConstantCoefficients(np.ones(LAGS.m)))
        x = np.ones(shape)
        op(LAGS, a, x, np.zeros_like(x))
        assert a.calls == expected

def test_2d_lags():
    lags = LagTable([0, 1, 0], [0, 0, 1])
    a = ConstantCoefficients([1.0, -0.3, -0.3])
    x = random_field((3, 4, 5), 13)
    y = apply(lags, a, x, np.zeros_like(x))
    assert_almost_equal(y, reference_apply(lags, a, x), 1e-12)

# vim:sw=4:sts=4:et
