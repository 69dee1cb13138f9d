"""
Local causal filtering of 2D fields.

Fields are NumPy arrays indexed as ``x[i2, i1]`` so that the 1st dimension
varies fastest. Coefficients *a2* are fetched as ``a2.get(i1, i2, a)`` (see
:py:class:`causalfilt.coeffs.Coefficients2`) exactly once for every sample,
in the scan order documented for each operator. ``lags.lag3``, if any, must be
zero.

Scan order is row by row, ascending or descending in both dimensions. Each row
is split into the zones computed by :py:func:`causalfilt.zones.zones2` so that
taps are bounds checked only near the edges of the field.

"""
import numpy as np

from causalfilt.lowlevel import coefficient_buffer, tap_scatter, tap_sum
from causalfilt.utils import check_distinct, check_fields
from causalfilt.zones import zones2

__all__ = (
    'apply',
    'apply_transpose',
    'apply_inverse',
    'apply_inverse_transpose',
)

def apply(lags, a2, x, y):
    """Apply the filter: ``y[i2, i1] = sum_j a[j]*x[i2-lag2[j], i1-lag1[j]]``.

    Samples are computed in descending order and may be computed in-place.

    :returns: *y*

    """
    x, y = check_fields(lags, x, y, 2)
    a = coefficient_buffer(lags, y)
    l1, l2, _ = lags.trailing()
    for i2, i1s, checks in zones2(lags, x.shape).scan(descending=True):
        k2 = i2-l2
        for i1 in i1s:
            a2.get(i1, i2, a)
            y[i2, i1] = a[0]*x[i2, i1] + tap_sum(x, (k2, i1-l1), a, checks)
    return y

def apply_transpose(lags, a2, x, y):
    """Apply the transpose of the filter.

    Samples are visited in ascending order; each output sample is set before
    any later sample scatters into it. May be computed in-place.

    :returns: *y*

    """
    x, y = check_fields(lags, x, y, 2)
    a = coefficient_buffer(lags, y)
    l1, l2, _ = lags.trailing()
    for i2, i1s, checks in zones2(lags, x.shape).scan():
        k2 = i2-l2
        for i1 in i1s:
            a2.get(i1, i2, a)
            xi = x[i2, i1]
            y[i2, i1] = a[0]*xi
            tap_scatter(y, (k2, i1-l1), a, xi, checks)
    return y

def apply_inverse(lags, a2, y, x):
    """Apply the inverse of the filter.

    Samples are computed in ascending order, each from the input and from
    output samples already computed. May be computed in-place. Coefficients
    must be minimum-phase for the inverse to be stable; this is not checked.

    :returns: *x*

    """
    y, x = check_fields(lags, y, x, 2)
    a = coefficient_buffer(lags, x)
    l1, l2, _ = lags.trailing()
    with np.errstate(divide='ignore', invalid='ignore'):
        for i2, i1s, checks in zones2(lags, y.shape).scan():
            k2 = i2-l2
            for i1 in i1s:
                a2.get(i1, i2, a)
                xi = tap_sum(x, (k2, i1-l1), a, checks)
                x[i2, i1] = (y[i2, i1]-xi)/a[0]
    return x

def apply_inverse_transpose(lags, a2, y, x):
    """Apply the inverse of the transpose of the filter.

    Samples are computed in descending order. Cannot be applied in-place.

    :returns: *x*
    :raises AliasingError: if *x* and *y* share memory

    """
    y, x = check_fields(lags, y, x, 2)
    check_distinct(x, y)
    x[...] = 0
    a = coefficient_buffer(lags, x)
    l1, l2, _ = lags.trailing()
    with np.errstate(divide='ignore', invalid='ignore'):
        for i2, i1s, checks in zones2(lags, y.shape).scan(descending=True):
            k2 = i2-l2
            for i1 in i1s:
                a2.get(i1, i2, a)
                x[i2, i1] = (y[i2, i1]-x[i2, i1])/a[0]
                tap_scatter(x, (k2, i1-l1), a, x[i2, i1], checks)
    return x

# vim:sw=4:sts=4:et
