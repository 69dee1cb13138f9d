"""
Local causal filtering of 1D fields.

Each operator takes a :py:class:`causalfilt.LagTable` *lags*, coefficients *a1*
(see :py:class:`causalfilt.coeffs.Coefficients1`), an input array and an output
array. ``a1.get`` is called exactly once for every sample, in the scan order
documented for the operator. Only ``lags.lag1`` is used; any other lags must
be zero.

"""
import numpy as np

from causalfilt.lowlevel import coefficient_buffer, tap_scatter, tap_sum
from causalfilt.utils import check_distinct, check_fields
from causalfilt.zones import zones1

__all__ = (
    'apply',
    'apply_transpose',
    'apply_inverse',
    'apply_inverse_transpose',
)

def apply(lags, a1, x, y):
    """Apply the filter: ``y[i1] = sum_j a[j]*x[i1-lag1[j]]``.

    Samples are computed in descending order and may be computed in-place,
    i.e. *x* and *y* may be the same array.

    :returns: *y*

    """
    x, y = check_fields(lags, x, y, 1)
    a = coefficient_buffer(lags, y)
    l1 = lags.trailing()[0]
    for i1s, checks in zones1(lags, x.shape[0]).scan(descending=True):
        for i1 in i1s:
            a1.get(i1, a)
            y[i1] = a[0]*x[i1] + tap_sum(x, (i1-l1,), a, checks)
    return y

def apply_transpose(lags, a1, x, y):
    """Apply the transpose of the filter.

    Samples are visited in ascending order. Each output sample is first set
    from the leading coefficient and then accumulates contributions scattered
    back from later input samples. May be computed in-place.

    :returns: *y*

    """
    x, y = check_fields(lags, x, y, 1)
    a = coefficient_buffer(lags, y)
    l1 = lags.trailing()[0]
    for i1s, checks in zones1(lags, x.shape[0]).scan():
        for i1 in i1s:
            a1.get(i1, a)
            xi = x[i1]
            y[i1] = a[0]*xi
            tap_scatter(y, (i1-l1,), a, xi, checks)
    return y

def apply_inverse(lags, a1, y, x):
    """Apply the inverse of the filter, solving for *x* the recursion
    ``x[i1] = (y[i1] - sum_{j>0} a[j]*x[i1-lag1[j]]) / a[0]``.

    Samples are computed in ascending order and may be computed in-place.
    The inverse is stable only for minimum-phase coefficients, which are not
    checked. Zero leading coefficients yield infinite or NaN samples.

    :returns: *x*

    """
    y, x = check_fields(lags, y, x, 1)
    a = coefficient_buffer(lags, x)
    l1 = lags.trailing()[0]
    with np.errstate(divide='ignore', invalid='ignore'):
        for i1s, checks in zones1(lags, y.shape[0]).scan():
            for i1 in i1s:
                a1.get(i1, a)
                xi = tap_sum(x, (i1-l1,), a, checks)
                x[i1] = (y[i1]-xi)/a[0]
    return x

def apply_inverse_transpose(lags, a1, y, x):
    """Apply the inverse of the transpose of the filter.

    *x* is zeroed and then samples are computed in descending order, with *x*
    accumulating contributions scattered back from later samples. Hence this
    operator cannot be applied in-place.

    :returns: *x*
    :raises AliasingError: if *x* and *y* share memory

    """
    y, x = check_fields(lags, y, x, 1)
    check_distinct(x, y)
    x[...] = 0
    a = coefficient_buffer(lags, x)
    l1 = lags.trailing()[0]
    with np.errstate(divide='ignore', invalid='ignore'):
        for i1s, checks in zones1(lags, y.shape[0]).scan(descending=True):
            for i1 in i1s:
                a1.get(i1, a)
                x[i1] = (y[i1]-x[i1])/a[0]
                tap_scatter(x, (i1-l1,), a, x[i1], checks)
    return x

# vim:sw=4:sts=4:et
