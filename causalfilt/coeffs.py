"""
Suppliers of local filter coefficients.

The filter operators get coefficients for every output sample through an
object with a ``get`` method taking the sample's indices and an array to fill.
The abstract classes :py:class:`Coefficients1`, :py:class:`Coefficients2` and
:py:class:`Coefficients3` document that interface for 1, 2 and 3 dimensions.
Any object with a matching ``get`` method may be passed to an operator; it
need not derive from these classes.

"""
from abc import ABCMeta, abstractmethod

import numpy as np

__all__ = [
    'Coefficients1',
    'Coefficients2',
    'Coefficients3',

    'ConstantCoefficients',
    'ArrayCoefficients',
    'FunctionCoefficients',
]

class Coefficients1(metaclass=ABCMeta):
    """Filter coefficients indexed in 1 dimension."""
    @abstractmethod
    def get(self, i1, a):
        """Fill *a* with the local filter coefficients for sample *i1*.

        :param i1: sample index in 1st dimension
        :param a: array of length *m* to be filled in place

        """
        raise NotImplementedError()

class Coefficients2(metaclass=ABCMeta):
    """Filter coefficients indexed in 2 dimensions."""
    @abstractmethod
    def get(self, i1, i2, a):
        """Fill *a* with the local filter coefficients for sample
        ``(i1, i2)``. Note that indices are passed fastest dimension first,
        whereas the field is stored as ``x[i2, i1]``.

        """
        raise NotImplementedError()

class Coefficients3(metaclass=ABCMeta):
    """Filter coefficients indexed in 3 dimensions."""
    @abstractmethod
    def get(self, i1, i2, i3, a):
        """Fill *a* with the local filter coefficients for sample
        ``(i1, i2, i3)``, stored as ``x[i3, i2, i1]``.

        """
        raise NotImplementedError()

class ConstantCoefficients(object):
    """The same coefficients for every sample. A local causal filter with
    constant coefficients is shift-invariant, i.e. an ordinary causal filter.

    :param a: sequence of *m* filter coefficients

    Instances may be used with fields of any dimensionality.

    """
    def __init__(self, a):
        self.a = np.array(a, dtype=np.float64)

    def get(self, *args):
        args[-1][:] = self.a

class ArrayCoefficients(object):
    """Coefficients looked up from an array.

    :param table: array with shape ``field.shape + (m,)``

    ``table[i2, i1, :]`` gives the coefficients for sample ``(i1, i2)`` of a 2D
    field; similarly for 1D and 3D fields.

    """
    def __init__(self, table):
        self.table = np.asanyarray(table)

    def get(self, *args):
        # indices arrive fastest dimension first
        index = tuple(reversed(args[:-1]))
        args[-1][:] = self.table[index]

class FunctionCoefficients(object):
    """Coefficients computed by a function of sample indices.

    :param fn: callable taking ``(i1[, i2[, i3]])`` and returning a sequence of
        *m* coefficients

    """
    def __init__(self, fn):
        self.fn = fn

    def get(self, *args):
        args[-1][:] = self.fn(*args[:-1])

for _cls in (ConstantCoefficients, ArrayCoefficients, FunctionCoefficients):
    Coefficients1.register(_cls)
    Coefficients2.register(_cls)
    Coefficients3.register(_cls)
del _cls

# vim:sw=4:sts=4:et
