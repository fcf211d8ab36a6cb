"""
Polynomial multiplication via NTT

convolve() is the bare driver: equal power-of-two lengths, no padding, the
result is the length-n cyclic convolution. multiply_polynomials() pads to
the product length first, so it returns the ordinary (linear) product.
"""

import logging

import numpy as np

from .params import MODULUS
from .transform import ForwardTransform, intt, ntt

log = logging.getLogger(__name__)


def next_power_of_two(x):
    return 1 if x <= 1 else 1 << (x - 1).bit_length()


def pointwise_multiply(a, b):
    """
    Element-wise product mod MODULUS

    Operands are reduced first, so each product is < 2^60 and fits int64.
    """
    a = np.asarray(a, dtype=object)
    b = np.asarray(b, dtype=object)
    if a.ndim != 1 or a.shape != b.shape:
        raise ValueError(f"Length mismatch: {a.shape} vs {b.shape}")
    a = (a % MODULUS).astype(np.int64)
    b = (b % MODULUS).astype(np.int64)
    return a * b % MODULUS


def convolve(a, b, n, variant=ForwardTransform.CT):
    """
    Cyclic convolution of two length-n sequences

    a and b are transformed in place and hold their NTT images afterwards.
    The caller picks n >= len(a*b) to get the true product coefficients.

    Returns:
        List of n coefficients, each reduced mod MODULUS
    """
    if len(a) != len(b):
        raise ValueError(f"Length mismatch: {len(a)} vs {len(b)}")

    ntt(a, n, variant=variant)
    ntt(b, n, variant=variant)
    result = pointwise_multiply(a, b)
    intt(result, n)
    return [int(c) for c in result]


def multiply_polynomials(a, b, variant=ForwardTransform.CT):
    """
    Product of two coefficient lists (lowest degree first)

    Inputs are copied and zero-padded to the next power of two >= the product
    length; they are left untouched.
    """
    if len(a) == 0 or len(b) == 0:
        raise ValueError("Cannot multiply an empty polynomial")

    out_len = len(a) + len(b) - 1
    n = next_power_of_two(out_len)
    log.debug("multiply: deg %d x deg %d, padded to n=%d", len(a) - 1, len(b) - 1, n)

    fa = [int(c) % MODULUS for c in a] + [0] * (n - len(a))
    fb = [int(c) % MODULUS for c in b] + [0] * (n - len(b))
    return convolve(fa, fb, n, variant)[:out_len]
