"""
A multi-dimensional causal filter with locally variable coefficients.

"""
import logging

import numpy as np

import causalfilt.filter1d
import causalfilt.filter2d
import causalfilt.filter3d
from causalfilt.exceptions import FieldShapeError, InvalidLagError
from causalfilt.lags import LagTable
from causalfilt.utils import asfarray

__all__ = ('LocalCausalFilter', 'SCAN_ORDER',)

# Operator implementations keyed by field rank
_OPERATORS = {
    1: causalfilt.filter1d,
    2: causalfilt.filter2d,
    3: causalfilt.filter3d,
}

SCAN_ORDER = {
    'apply': 'descending',
    'apply_transpose': 'ascending',
    'apply_inverse': 'ascending',
    'apply_inverse_transpose': 'descending',
}
"""The order in which each operator visits samples and calls the coefficient
supplier. Only the inverse transpose cannot be applied in-place."""

class LocalCausalFilter(object):
    """
    A causal filter whose coefficients may vary from one output sample to the
    next. The output samples of a causal filter depend only on present and
    past input samples, where "past" refers to a scan which runs fastest along
    the 1st dimension and slowest along the last.

    :param lag1: sequence of lags in the 1st dimension, or a
        :py:class:`causalfilt.LagTable`
    :param lag2: *(optional)* sequence of lags in the 2nd dimension
    :param lag3: *(optional)* sequence of lags in the 3rd dimension

    A local causal filter is not shift-invariant and so its application is not
    a convolution. It is, however, linear, with an anti-causal transpose. If
    its coefficients are minimum-phase it has a stable causal inverse, a
    recursive all-pole filter, and its transpose has a stable anti-causal
    inverse. See Claerbout, J., 1998, Multidimensional recursive filters via a
    helix: Geophysics, v. 63, n. 5, p. 1532-1541. Minimum phase is the
    caller's responsibility and is never checked.

    Each operator takes a coefficient supplier *a*, an input array *x* and an
    optional output array *y*, and returns the output. The rank of *x* selects
    the 1D, 2D or 3D implementation; *a* must then provide ``get(i1, a)``,
    ``get(i1, i2, a)`` or ``get(i1, i2, i3, a)`` respectively. If *y* is omitted
    a new array is allocated.

    The filter, its transpose and its inverse may be applied in-place by
    passing the same array for *x* and *y*. The inverse transpose may not.

    Example::

        # A 2D filter with taps at (0, 0), (1, 0) and (0, 1)
        lcf = LocalCausalFilter([0, 1, 0], [0, 0, 1])
        a = ConstantCoefficients([1.0, -0.3, -0.3])
        y = lcf.apply(a, x)
        x2 = lcf.apply_inverse(a, y)

    """
    def __init__(self, lag1, lag2=None, lag3=None):
        if isinstance(lag1, LagTable):
            if lag2 is not None or lag3 is not None:
                raise InvalidLagError('Cannot specify lag2 or lag3 with a LagTable')
            self.lag_table = lag1
        else:
            self.lag_table = LagTable(lag1, lag2, lag3)

    @property
    def lag1(self):
        """A copy of the lags in the 1st dimension."""
        return self.lag_table.lag1

    @property
    def lag2(self):
        """A copy of the lags in the 2nd dimension."""
        return self.lag_table.lag2

    @property
    def lag3(self):
        """A copy of the lags in the 3rd dimension."""
        return self.lag_table.lag3

    def apply(self, a, x, y=None):
        """Apply this filter."""
        x, y, operators = self._prepare(x, y)
        return operators.apply(self.lag_table, a, x, y)

    def apply_transpose(self, a, x, y=None):
        """Apply the transpose of this filter."""
        x, y, operators = self._prepare(x, y)
        return operators.apply_transpose(self.lag_table, a, x, y)

    def apply_inverse(self, a, y, x=None):
        """Apply the inverse of this filter."""
        y, x, operators = self._prepare(y, x)
        return operators.apply_inverse(self.lag_table, a, y, x)

    def apply_inverse_transpose(self, a, y, x=None):
        """Apply the inverse of the transpose of this filter. *x* must not
        share memory with *y*.

        """
        y, x, operators = self._prepare(y, x)
        return operators.apply_inverse_transpose(self.lag_table, a, y, x)

    def _prepare(self, src, dst):
        src = asfarray(src)
        try:
            operators = _OPERATORS[src.ndim]
        except KeyError:
            raise FieldShapeError('Fields must have 1, 2 or 3 dimensions, not {0}'.format(src.ndim))
        if dst is None:
            dst = np.zeros_like(src)
            logging.debug('Allocated output with shape {0} and dtype {1}'.format(
                dst.shape, dst.dtype))
        return src, dst, operators

    def __repr__(self):
        return 'LocalCausalFilter({0!r})'.format(self.lag_table)

# vim:sw=4:sts=4:et
