"""
Lag tables describe the stencil of a local causal filter: which input samples
contribute to each output sample.

"""
import numpy as np

from causalfilt.exceptions import InvalidLagError

__all__ = ('LagTable',)

def _as_lags(lags, name):
    lags = np.array(lags, copy=True)
    if lags.ndim != 1:
        raise InvalidLagError('{0} must be one-dimensional'.format(name))
    if lags.size > 0 and not np.issubdtype(lags.dtype, np.integer):
        if not np.all(np.equal(np.mod(lags, 1), 0)):
            raise InvalidLagError('{0} must contain only integers'.format(name))
    lags = lags.astype(np.intp)
    lags.setflags(write=False)
    return lags

class LagTable(object):
    """An immutable, validated set of filter lags.

    :param lag1: sequence of lags in the 1st dimension
    :param lag2: *(optional)* sequence of lags in the 2nd dimension
    :param lag3: *(optional)* sequence of lags in the 3rd dimension
    :raises InvalidLagError: if the lags do not describe a causal filter

    Lag *j* refers to the input sample ``x[i1-lag1[j], i2-lag2[j],
    i3-lag3[j]]``, weighted by the *j*-th filter coefficient when computing
    output sample ``y[i1, i2, i3]``. Lags not specified are zero.

    For *j* = 0 only, all lags are zero; this is the leading tap. For *j* > 0:

    * ``lag3[j]`` must be non-negative;
    * if ``lag3[j]`` is zero, ``lag2[j]`` must be non-negative;
    * if ``lag3[j]`` and ``lag2[j]`` are zero, ``lag1[j]`` must be positive.

    Hence no lag refers to a sample after the output sample in a scan which
    runs fastest along the 1st dimension and slowest along the 3rd. In 2D such
    filters are also called non-symmetric half-plane (NSHP) filters.

    The sequences passed are copied. The attributes *lag1*, *lag2* and *lag3*
    return copies.

    """
    def __init__(self, lag1, lag2=None, lag3=None):
        if lag3 is not None and lag2 is None:
            raise InvalidLagError('lag3 requires lag2')

        lag1 = _as_lags(lag1, 'lag1')
        m = lag1.shape[0]
        if m == 0:
            raise InvalidLagError('lag1 must contain at least one lag')

        ndim = 1
        if lag2 is not None:
            lag2 = _as_lags(lag2, 'lag2')
            ndim = 2
        else:
            lag2 = _as_lags(np.zeros(m, dtype=np.intp), 'lag2')
        if lag3 is not None:
            lag3 = _as_lags(lag3, 'lag3')
            ndim = 3
        else:
            lag3 = _as_lags(np.zeros(m, dtype=np.intp), 'lag3')

        for name, lags in (('lag2', lag2), ('lag3', lag3)):
            if lags.shape[0] != m:
                raise InvalidLagError(
                    '{0} has length {1} but lag1 has length {2}'.format(name, lags.shape[0], m))

        for name, lags in (('lag1', lag1), ('lag2', lag2), ('lag3', lag3)):
            if lags[0] != 0:
                raise InvalidLagError('{0}[0] must be zero'.format(name))

        for j in range(1, m):
            if lag3[j] < 0:
                raise InvalidLagError('lag3[{0}] must be non-negative'.format(j))
            if lag3[j] != 0:
                continue
            if lag2[j] < 0:
                raise InvalidLagError('if lag3[{0}] == 0, lag2[{0}] must be non-negative'.format(j))
            if lag2[j] == 0 and lag1[j] <= 0:
                raise InvalidLagError(
                    'if lag3[{0}] == 0 and lag2[{0}] == 0, lag1[{0}] must be positive'.format(j))

        self._ndim = ndim
        self._lag1, self._lag2, self._lag3 = lag1, lag2, lag3
        self._min1, self._max1 = int(lag1.min()), int(lag1.max())
        self._min2, self._max2 = int(lag2.min()), int(lag2.max())
        self._min3, self._max3 = int(lag3.min()), int(lag3.max())

    @property
    def ndim(self):
        """Number of dimensions for which lags were specified."""
        return self._ndim

    @property
    def m(self):
        """Number of filter coefficients, including the leading one."""
        return self._lag1.shape[0]

    @property
    def lag1(self):
        return self._lag1.copy()

    @property
    def lag2(self):
        return self._lag2.copy()

    @property
    def lag3(self):
        return self._lag3.copy()

    @property
    def min1(self):
        return self._min1

    @property
    def max1(self):
        return self._max1

    @property
    def min2(self):
        return self._min2

    @property
    def max2(self):
        return self._max2

    @property
    def min3(self):
        return self._min3

    @property
    def max3(self):
        return self._max3

    def trailing(self):
        """Return a tuple of read-only arrays ``(lag1, lag2, lag3)`` for the
        taps *j* > 0, as used by the filter operators.

        """
        return self._lag1[1:], self._lag2[1:], self._lag3[1:]

    def __len__(self):
        return self.m

    def __eq__(self, other):
        if not isinstance(other, LagTable):
            return NotImplemented
        return (self._ndim == other._ndim and
                np.array_equal(self._lag1, other._lag1) and
                np.array_equal(self._lag2, other._lag2) and
                np.array_equal(self._lag3, other._lag3))

    def __hash__(self):
        return hash((self._ndim, tuple(self._lag1), tuple(self._lag2), tuple(self._lag3)))

    def __repr__(self):
        lags = [self._lag1, self._lag2, self._lag3][:self._ndim]
        return 'LagTable({0})'.format(', '.join(str(l.tolist()) for l in lags))

# vim:sw=4:sts=4:et
