"""
Local causal filtering of 3D fields.

Fields are NumPy arrays indexed as ``x[i3, i2, i1]``. Coefficients *a3* are
fetched as ``a3.get(i1, i2, i3, a)`` (see
:py:class:`causalfilt.coeffs.Coefficients3`) exactly once for every sample.
Scan order is slab by slab, then row by row, with the zones computed by
:py:func:`causalfilt.zones.zones3`.

"""
import numpy as np

from causalfilt.lowlevel import coefficient_buffer, tap_scatter, tap_sum
from causalfilt.utils import check_distinct, check_fields
from causalfilt.zones import zones3

__all__ = (
    'apply',
    'apply_transpose',
    'apply_inverse',
    'apply_inverse_transpose',
)

def apply(lags, a3, x, y):
    """Apply the filter. Samples are computed in descending order and may be
    computed in-place.

    :returns: *y*

    """
    x, y = check_fields(lags, x, y, 3)
    a = coefficient_buffer(lags, y)
    l1, l2, l3 = lags.trailing()
    for i3, i2, i1s, checks in zones3(lags, x.shape).scan(descending=True):
        k3, k2 = i3-l3, i2-l2
        for i1 in i1s:
            a3.get(i1, i2, i3, a)
            y[i3, i2, i1] = a[0]*x[i3, i2, i1] + tap_sum(x, (k3, k2, i1-l1), a, checks)
    return y

def apply_transpose(lags, a3, x, y):
    """Apply the transpose of the filter. Samples are visited in ascending
    order. May be computed in-place.

    :returns: *y*

    """
    x, y = check_fields(lags, x, y, 3)
    a = coefficient_buffer(lags, y)
    l1, l2, l3 = lags.trailing()
    for i3, i2, i1s, checks in zones3(lags, x.shape).scan():
        k3, k2 = i3-l3, i2-l2
        for i1 in i1s:
            a3.get(i1, i2, i3, a)
            xi = x[i3, i2, i1]
            y[i3, i2, i1] = a[0]*xi
            tap_scatter(y, (k3, k2, i1-l1), a, xi, checks)
    return y

def apply_inverse(lags, a3, y, x):
    """Apply the inverse of the filter. Samples are computed in ascending
    order and may be computed in-place.

    :returns: *x*

    """
    y, x = check_fields(lags, y, x, 3)
    a = coefficient_buffer(lags, x)
    l1, l2, l3 = lags.trailing()
    with np.errstate(divide='ignore', invalid='ignore'):
        for i3, i2, i1s, checks in zones3(lags, y.shape).scan():
            k3, k2 = i3-l3, i2-l2
            for i1 in i1s:
                a3.get(i1, i2, i3, a)
                xi = tap_sum(x, (k3, k2, i1-l1), a, checks)
                x[i3, i2, i1] = (y[i3, i2, i1]-xi)/a[0]
    return x

def apply_inverse_transpose(lags, a3, y, x):
    """Apply the inverse of the transpose of the filter. Samples are computed
    in descending order. Cannot be applied in-place.

    :returns: *x*
    :raises AliasingError: if *x* and *y* share memory

    """
    y, x = check_fields(lags, y, x, 3)
    check_distinct(x, y)
    x[...] = 0
    a = coefficient_buffer(lags, x)
    l1, l2, l3 = lags.trailing()
    with np.errstate(divide='ignore', invalid='ignore'):
        for i3, i2, i1s, checks in zones3(lags, y.shape).scan(descending=True):
            k3, k2 = i3-l3, i2-l2
            for i1 in i1s:
                a3.get(i1, i2, i3, a)
                x[i3, i2, i1] = (y[i3, i2, i1]-x[i3, i2, i1])/a[0]
                tap_scatter(x, (k3, k2, i1-l1), a, x[i3, i2, i1], checks)
    return x

# vim:sw=4:sts=4:et
