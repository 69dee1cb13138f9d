"""
Multi-dimensional causal filters with locally variable coefficients.

"""
__all__ = [
    '__version__',

    'LagTable',
    'LocalCausalFilter',
    'SCAN_ORDER',

    'Coefficients1',
    'Coefficients2',
    'Coefficients3',
    'ConstantCoefficients',
    'ArrayCoefficients',
    'FunctionCoefficients',

    'CausalFilterError',
    'InvalidLagError',
    'AliasingError',
    'FieldShapeError',
]

from causalfilt._version import __version__

from causalfilt.coeffs import (
    Coefficients1, Coefficients2, Coefficients3,
    ConstantCoefficients, ArrayCoefficients, FunctionCoefficients,
)
from causalfilt.exceptions import (
    CausalFilterError, InvalidLagError, AliasingError, FieldShapeError,
)
from causalfilt.filter import LocalCausalFilter, SCAN_ORDER
from causalfilt.lags import LagTable
