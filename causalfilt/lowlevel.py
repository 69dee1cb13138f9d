"""
Per-sample helpers shared by the 1D, 2D and 3D filter operators.

Tap indices are passed as tuples of integer arrays in array axis order, so
``k = (k2, k1)`` for a 2D field stored as ``x[i2, i1]``. Only the trailing taps
*j* > 0 are involved; the leading tap is always handled by the caller.

"""
import numpy as np

__all__ = (
    'coefficient_buffer',
    'in_bounds',
    'tap_sum',
    'tap_scatter',
)

def coefficient_buffer(lags, y):
    """Return a zeroed coefficient array of length ``lags.m`` with the dtype of
    the output field *y*.

    """
    return np.zeros(lags.m, dtype=y.dtype)

def in_bounds(k, shape, checks):
    """Return a boolean mask selecting the taps in *k* which pass every check
    named in *checks*. See :py:mod:`causalfilt.zones` for check names.

    """
    ndim = len(shape)
    ok = np.ones(k[0].shape, dtype=bool)
    for check in checks:
        dim = int(check[2:])
        axis = ndim - dim
        if check.startswith('lo'):
            ok &= k[axis] >= 0
        else:
            ok &= k[axis] < shape[axis]
    return ok

def tap_sum(x, k, a, checks=()):
    """Return the sum over taps *j* > 0 of ``a[j] * x[k[j]]``. Taps failing
    *checks* are skipped. With no checks, every tap must lie inside *x*.

    """
    if not checks:
        return np.dot(a[1:], x[k])
    ok = in_bounds(k, x.shape, checks)
    return np.dot(a[1:][ok], x[tuple(kk[ok] for kk in k)])

def tap_scatter(y, k, a, v, checks=()):
    """Add ``a[j] * v`` to ``y[k[j]]`` for every tap *j* > 0 passing *checks*.
    Repeated tap indices accumulate.

    """
    if not checks:
        np.add.at(y, k, a[1:]*v)
        return
    ok = in_bounds(k, y.shape, checks)
    np.add.at(y, tuple(kk[ok] for kk in k), a[1:][ok]*v)

# vim:sw=4:sts=4:et
