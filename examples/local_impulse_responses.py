#!/usr/bin/env python
"""
An example of the impulse responses of a local causal filter.

A 2D causal filter is given coefficients which vary smoothly across the image,
so that the recursive inverse filter smears samples along a direction which
rotates from left to right. Applying the inverse and then the inverse
transpose to an image of scattered impulses gives a symmetric, locally
oriented smoothing of each impulse.

"""
import logging

from matplotlib.pyplot import *
import numpy as np

from causalfilt import LocalCausalFilter, FunctionCoefficients

logging.basicConfig(level=logging.INFO)

def main():
    N = 81

    # Taps at the leading sample, one sample back along the row, and the three
    # nearest samples of the previous row.
    lcf = LocalCausalFilter([0, 1, -1, 0, 1], [0, 0, 1, 1, 1])

    def coefficients(i1, i2):
        # weight the taps according to a direction which rotates
        # with i1
        theta = np.pi * i1 / (N - 1)
        w = 0.45 * np.array([np.cos(theta)**2, 0.0, np.sin(theta)**2, 0.0])
        w[1] = 0.45 * max(0.0, np.sin(2*theta))
        w[3] = 0.45 * max(0.0, -np.sin(2*theta))
        return np.concatenate(([1.0], -w))

    a = FunctionCoefficients(coefficients)

    x = np.zeros((N, N))
    x[10::20, 10::20] = 1

    logging.info('Applying inverse filter')
    y = lcf.apply_inverse(a, x)

    logging.info('Applying inverse transpose filter')
    z = lcf.apply_inverse_transpose(a, y)

    figure(figsize=(12, 6))
    subplot(1, 2, 1)
    imshow(y, cmap=cm.gray, interpolation='none')
    title('Causal inverse')
    subplot(1, 2, 2)
    imshow(z, cmap=cm.gray, interpolation='none')
    title('Inverse followed by its transpose')
    show()

if __name__ == '__main__':
    main()

# vim:sw=4:sts=4:et
