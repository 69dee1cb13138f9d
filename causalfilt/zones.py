"""
Partitioning of field indices into zones by the bounds checks their stencil
taps need.

In the *interior* every tap of the stencil falls inside the field, so a filter
need not test any tap. Near the edges some taps fall outside the field; these
taps are skipped, which truncates the stencil as if the field were padded with
zeros. Each zone records which of the following checks its taps require:

============ ==============================
Check        Condition on tap index
============ ==============================
``'lo1'``    ``0 <= k1``
``'hi1'``    ``k1 < n1``
``'lo2'``    ``0 <= k2``
``'hi2'``    ``k2 < n2``
``'lo3'``    ``0 <= k3``
============ ==============================

There is no ``'hi3'`` check since no lag refers to a later slab. Zone bounds are
computed once per operator call by :py:func:`zones1`, :py:func:`zones2` or
:py:func:`zones3`, whose result can :py:meth:`scan` the field in ascending or
descending order.

"""
from collections import namedtuple
import logging

__all__ = (
    'Zones1', 'Zones2', 'Zones3',
    'zones1', 'zones2', 'zones3',
)

_ALL1 = ('lo1',)
_ALL2 = ('lo1', 'hi1', 'lo2')
_ALL3 = ('lo1', 'hi1', 'lo2', 'hi2', 'lo3')

def _segments(pieces, descending):
    # pieces is a list of (start, stop, checks) in ascending order
    if descending:
        pieces = [(range(stop-1, start-1, -1), checks) for start, stop, checks in reversed(pieces)]
    else:
        pieces = [(range(start, stop), checks) for start, stop, checks in pieces]
    return [(r, checks) for r, checks in pieces if len(r) > 0]

def _rows(n, descending):
    return range(n-1, -1, -1) if descending else range(n)

class Zones1(namedtuple('Zones1', 'n1 i1lo')):
    """Zones of a 1D field of length *n1*. Samples ``i1 >= i1lo`` are interior.

    """
    __slots__ = ()

    def is_interior(self, i1):
        return self.i1lo <= i1

    def scan(self, descending=False):
        """Yield ``(i1s, checks)`` pairs covering the field once, where *i1s*
        is a range of indices visited in scan order and *checks* a tuple of the
        bounds checks needed for those samples.

        """
        pieces = [(0, self.i1lo, _ALL1), (self.i1lo, self.n1, ())]
        for i1s, checks in _segments(pieces, descending):
            yield i1s, checks

class Zones2(namedtuple('Zones2', 'n1 n2 i1lo i1hi i2lo')):
    """Zones of a 2D field with shape ``(n2, n1)``.

    Rows ``i2 < i2lo`` lie on the edge and every tap is checked. Rows
    ``i2 >= i2lo`` are split into a low edge ``[0, i1lo)``, the interior
    ``[i1lo, i1hi)`` and a high edge ``[i1hi, n1)``.

    """
    __slots__ = ()

    def is_interior(self, i1, i2):
        return self.i2lo <= i2 and self.i1lo <= i1 < self.i1hi

    def _pieces(self, i2):
        if i2 < self.i2lo:
            return [(0, self.n1, _ALL2)]
        return [(0, self.i1lo, ('lo1',)), (self.i1lo, self.i1hi, ()), (self.i1hi, self.n1, ('hi1',))]

    def scan(self, descending=False):
        """Yield ``(i2, i1s, checks)`` triples covering the field once in scan
        order. See :py:meth:`Zones1.scan`.

        """
        for i2 in _rows(self.n2, descending):
            for i1s, checks in _segments(self._pieces(i2), descending):
                yield i2, i1s, checks

class Zones3(namedtuple('Zones3', 'n1 n2 n3 i1lo i1hi i2lo i2hi i3lo')):
    """Zones of a 3D field with shape ``(n3, n2, n1)``.

    Slabs ``i3 < i3lo`` lie on the edge and every tap is checked. In slabs
    ``i3 >= i3lo``, rows ``i2 < i2lo`` and ``i2 >= i2hi`` are edge rows and the
    rows between are split along the 1st dimension as for :py:class:`Zones2`.

    """
    __slots__ = ()

    def is_interior(self, i1, i2, i3):
        return (self.i3lo <= i3 and self.i2lo <= i2 < self.i2hi and
                self.i1lo <= i1 < self.i1hi)

    def _pieces(self, i2, i3):
        if i3 < self.i3lo:
            return [(0, self.n1, _ALL3)]
        if i2 < self.i2lo:
            return [(0, self.n1, ('lo1', 'hi1', 'lo2'))]
        if i2 >= self.i2hi:
            return [(0, self.n1, ('lo1', 'hi1', 'hi2'))]
        return [(0, self.i1lo, ('lo1',)), (self.i1lo, self.i1hi, ()), (self.i1hi, self.n1, ('hi1',))]

    def scan(self, descending=False):
        """Yield ``(i3, i2, i1s, checks)`` tuples covering the field once in
        scan order. See :py:meth:`Zones1.scan`.

        """
        for i3 in _rows(self.n3, descending):
            for i2 in _rows(self.n2, descending):
                for i1s, checks in _segments(self._pieces(i2, i3), descending):
                    yield i3, i2, i1s, checks

def zones1(lags, n1):
    """Compute the zones of a 1D field of length *n1* filtered with the
    :py:class:`causalfilt.LagTable` *lags*.

    """
    z = Zones1(n1, min(lags.max1, n1))
    logging.debug('Zones for length {0}: {1}'.format(n1, z))
    return z

def zones2(lags, shape):
    """Compute the zones of a 2D field with shape ``(n2, n1)``."""
    n2, n1 = shape
    i1lo = min(lags.max1, n1)
    i1hi = min(n1, n1+lags.min1)
    i2lo = min(lags.max2, n2) if i1lo <= i1hi else n2
    z = Zones2(n1, n2, i1lo, i1hi, i2lo)
    logging.debug('Zones for shape {0}: {1}'.format(shape, z))
    return z

def zones3(lags, shape):
    """Compute the zones of a 3D field with shape ``(n3, n2, n1)``."""
    n3, n2, n1 = shape
    i1lo = min(lags.max1, n1)
    i1hi = min(n1, n1+lags.min1)
    i2lo = min(lags.max2, n2)
    i2hi = min(n2, n2+lags.min2)
    i3lo = min(lags.max3, n3) if i1lo <= i1hi and i2lo <= i2hi else n3
    z = Zones3(n1, n2, n3, i1lo, i1hi, i2lo, i2hi, i3lo)
    logging.debug('Zones for shape {0}: {1}'.format(shape, z))
    return z

# vim:sw=4:sts=4:et
