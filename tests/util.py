import itertools
import numpy as np

TOLERANCE = 1e-6

def assert_almost_equal(a, b, tolerance=TOLERANCE):
    md = np.abs(np.asarray(a, dtype=np.float64) - np.asarray(b, dtype=np.float64)).max()
    if md <= tolerance:
        return

    raise AssertionError(
            'Arrays differ by a maximum of {0} which is greater than the tolerance of {1}'.
            format(md, tolerance))

def random_field(shape, seed=None, dtype=np.float64):
    return np.random.RandomState(seed).randn(*shape).astype(dtype)

def local_coefficients(shape, m, seed=None):
    """Coefficient table of shape ``shape + (m,)`` whose leading coefficient
    dominates, so that inverses are well conditioned.

    """
    rs = np.random.RandomState(seed)
    table = 0.4 * (rs.rand(*(shape + (m,))) - 0.5) / max(1, m-1)
    table[..., 0] = 1.0 + 0.5*rs.rand(*shape)
    return table

class RecordingCoefficients(object):
    """Wraps a coefficient supplier and records the indices it is called with."""
    def __init__(self, inner):
        self.inner = inner
        self.calls = []

    def get(self, *args):
        self.calls.append(tuple(args[:-1]))
        self.inner.get(*args)

def _lag_rows(lags, ndim):
    return list(zip(*[lags.lag1, lags.lag2, lags.lag3][:ndim]))

def reference_apply(lags, a, x):
    """Single-loop, fully bounds-checked forward filter used as a reference.
    Field indices are in array order, lags in dimension order.

    """
    x = np.asarray(x, dtype=np.float64)
    y = np.zeros_like(x)
    ndim = x.ndim
    rows = _lag_rows(lags, ndim)
    c = np.zeros(lags.m)
    for index in itertools.product(*[range(n) for n in x.shape]):
        a.get(*(tuple(reversed(index)) + (c,)))
        total = 0.0
        for j, lag in enumerate(rows):
            k = tuple(i - l for i, l in zip(index, reversed(lag)))
            if all(0 <= kk < n for kk, n in zip(k, x.shape)):
                total += c[j] * x[k]
        y[index] = total
    return y

def reference_matrix(lags, a, shape):
    """Dense matrix of the forward filter acting on fields of *shape*."""
    n = int(np.prod(shape))
    A = np.zeros((n, n))
    for col in range(n):
        e = np.zeros(n)
        e[col] = 1
        A[:, col] = reference_apply(lags, a, e.reshape(shape)).ravel()
    return A

# vim:sw=4:sts=4:et
