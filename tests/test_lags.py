import numpy as np
from pytest import raises

from causalfilt import LagTable, InvalidLagError

def test_1d_defaults():
    lags = LagTable([0, 1, 2])
    assert lags.ndim == 1
    assert lags.m == 3
    assert len(lags) == 3
    assert np.all(lags.lag2 == 0)
    assert np.all(lags.lag3 == 0)
    assert (lags.min1, lags.max1) == (0, 2)
    assert (lags.min2, lags.max2) == (0, 0)
    assert lags.max3 == 0

def test_2d_extents():
    lags = LagTable([0, 1, -2, 0, 3], [0, 0, 1, 2, 1])
    assert lags.ndim == 2
    assert (lags.min1, lags.max1) == (-2, 3)
    assert (lags.min2, lags.max2) == (0, 2)

def test_3d_extents():
    lags = LagTable([0, 1, -1, 2], [0, 0, 1, -3], [0, 0, 0, 2])
    assert lags.ndim == 3
    assert (lags.min2, lags.max2) == (-3, 1)
    assert (lags.min3, lags.max3) == (0, 2)

def test_leading_tap_only():
    lags = LagTable([0])
    assert lags.m == 1
    assert all(len(l) == 0 for l in lags.trailing())

def test_copies_input():
    lag1 = [0, 1, 2]
    lags = LagTable(lag1)
    lag1[1] = 5
    assert lags.lag1.tolist() == [0, 1, 2]

def test_accessors_return_copies():
    lags = LagTable([0, 1, 2])
    l = lags.lag1
    l[1] = 7
    assert lags.lag1.tolist() == [0, 1, 2]

def test_trailing_is_read_only():
    l1, l2, l3 = LagTable([0, 1, 2]).trailing()
    assert l1.tolist() == [1, 2]
    with raises(ValueError):
        l1[0] = 3

def test_attributes_are_read_only():
    lags = LagTable([0, 1])
    with raises(AttributeError):
        lags.lag1 = [0, 2]
    with raises(AttributeError):
        lags.max1 = 4

def test_equality_and_hash():
    assert LagTable([0, 1]) == LagTable((0, 1))
    assert LagTable([0, 1]) != LagTable([0, 2])
    assert LagTable([0, 1]) != LagTable([0, 1], [0, 0])
    assert hash(LagTable([0, 1, 0], [0, 0, 1])) == hash(LagTable([0, 1, 0], [0, 0, 1]))

def test_repr():
    assert repr(LagTable([0, 1, 0], [0, 0, 1])) == 'LagTable([0, 1, 0], [0, 0, 1])'

def test_integral_floats_accepted():
    assert LagTable([0.0, 1.0]).lag1.tolist() == [0, 1]

def test_empty():
    with raises(InvalidLagError):
        LagTable([])

def test_non_integer():
    with raises(InvalidLagError) as e:
        LagTable([0, 1.5])
    assert 'integers' in str(e.value)

def test_not_one_dimensional():
    with raises(InvalidLagError):
        LagTable([[0, 1]])

def test_lengths_differ():
    with raises(InvalidLagError) as e:
        LagTable([0, 1, 2], [0, 0])
    assert 'lag2' in str(e.value)

def test_lag3_without_lag2():
    with raises(InvalidLagError):
        LagTable([0, 1], lag3=[0, 1])

def test_leading_lag_must_be_zero():
    with raises(InvalidLagError) as e:
        LagTable([1, 2])
    assert str(e.value) == 'lag1[0] must be zero'
    with raises(InvalidLagError) as e:
        LagTable([0, 1], [1, 0])
    assert str(e.value) == 'lag2[0] must be zero'
    with raises(InvalidLagError) as e:
        LagTable([0, 1], [0, 0], [2, 0])
    assert str(e.value) == 'lag3[0] must be zero'

def test_1d_lag_must_be_positive():
    with raises(InvalidLagError) as e:
        LagTable([0, 1, 0])
    assert 'lag1[2] must be positive' in str(e.value)
    with raises(InvalidLagError):
        LagTable([0, -1])

def test_2d_lag2_must_be_non_negative():
    with raises(InvalidLagError) as e:
        LagTable([0, 1], [0, -1])
    assert 'lag2[1] must be non-negative' in str(e.value)

def test_2d_lag1_positive_when_lag2_zero():
    LagTable([0, -3], [0, 1])
    with raises(InvalidLagError) as e:
        LagTable([0, -3], [0, 0])
    assert 'lag1[1] must be positive' in str(e.value)

def test_3d_rules():
    LagTable([0, -1, 2], [0, -4, 0], [0, 1, 1])
    with raises(InvalidLagError) as e:
        LagTable([0, 1], [0, 0], [0, -1])
    assert 'lag3[1] must be non-negative' in str(e.value)
    with raises(InvalidLagError):
        LagTable([0, 1], [0, -1], [0, 0])
    with raises(InvalidLagError):
        LagTable([0, 0], [0, 0], [0, 0])

def test_invalid_lag_error_is_value_error():
    with raises(ValueError):
        LagTable([0, 0])

# vim:sw=4:sts=4:et
