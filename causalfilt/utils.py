""" Useful utilities for checking fields passed to the filter operators."""

__all__ = ('asfarray', 'check_fields', 'check_distinct', 'dot',)

import numpy as np

from causalfilt.exceptions import AliasingError, FieldShapeError

def asfarray(X):
    """Similar to :py:func:`numpy.asarray` except that integer and boolean
    input is converted to double precision. Floating point arrays are passed
    through directly without copying.

    """
    X = np.asanyarray(X)
    if np.issubdtype(X.dtype, np.floating):
        return X
    if np.issubdtype(X.dtype, np.complexfloating):
        raise FieldShapeError('Complex fields are not supported')
    return X.astype(np.float64)

def check_fields(lags, x, y, ndim):
    """Check that input *x* and output *y* are suitable for an operator on
    *ndim*-dimensional fields using the :py:class:`causalfilt.LagTable`
    *lags*. Returns *x* and *y*, with *x* converted by :py:func:`asfarray`.

    :raises FieldShapeError: if *x* is not *ndim*-dimensional, *y* is not a
        writable floating point NumPy array of the same shape, or *lags* has
        non-zero lags in a dimension the field does not have.

    """
    x = asfarray(x)
    if x.ndim != ndim:
        raise FieldShapeError('Expected a {0}D field but got an array with shape {1}'.format(
            ndim, x.shape))
    if not isinstance(y, np.ndarray):
        raise FieldShapeError('Output must be a NumPy array')
    if not np.issubdtype(y.dtype, np.floating):
        raise FieldShapeError('Output must have a floating point dtype, not {0}'.format(y.dtype))
    if not y.flags.writeable:
        raise FieldShapeError('Output array is read-only')
    if y.shape != x.shape:
        raise FieldShapeError('Input shape {0} does not match output shape {1}'.format(
            x.shape, y.shape))

    extents = ((lags.min2, lags.max2), (lags.min3, lags.max3))
    for dim, (lo, hi) in enumerate(extents, 2):
        if dim > ndim and (lo != 0 or hi != 0):
            raise FieldShapeError(
                'Lags in dimension {0} must be zero to filter a {1}D field'.format(dim, ndim))

    return x, y

def check_distinct(y, x):
    """Raise :py:class:`AliasingError` if *y* and *x* share any memory."""
    if isinstance(y, np.ndarray) and isinstance(x, np.ndarray) and np.shares_memory(x, y):
        raise AliasingError('Input and output arrays must not share memory')

def dot(a, b):
    """Return the inner product of two fields of the same shape accumulated
    in double precision. Useful for checking that one operator is the
    transpose of another.

    """
    a, b = asfarray(a), asfarray(b)
    if a.shape != b.shape:
        raise FieldShapeError('Shapes {0} and {1} differ'.format(a.shape, b.shape))
    return float(np.dot(a.ravel().astype(np.float64), b.ravel().astype(np.float64)))

# vim:sw=4:sts=4:et
