"""
Exceptions raised by :py:mod:`causalfilt`. Every error here reports a
programming error detected before any samples are computed; none of them are
transient.

"""

__all__ = [
    'CausalFilterError',
    'InvalidLagError',
    'AliasingError',
    'FieldShapeError',
]

class CausalFilterError(Exception):
    """Base class for all errors raised by this package."""

class InvalidLagError(CausalFilterError, ValueError):
    """Raised when lags passed to :py:class:`causalfilt.LagTable` do not
    describe a causal stencil. The message names the violated condition.

    """

class AliasingError(CausalFilterError, ValueError):
    """Raised when an operator which cannot be applied in-place is given input
    and output arrays which share memory.

    """

class FieldShapeError(CausalFilterError, ValueError):
    """Raised when a field does not have the rank, shape or dtype required by
    an operator.

    """
