"""
Bit-reversal permutation

Reorders a length-n sequence (n = 2^h) so that position i holds the element
whose index is i with its low h bits reversed. Used as the prefix step of the
decimation-in-time transform and to restore natural order after the
decimation-in-frequency one.
"""

import numpy as np


def bit_reverse(index, width):
    """Reverse the low `width` bits of a single index"""
    result = 0
    for _ in range(width):
        result = (result << 1) | (index & 1)
        index >>= 1
    return result


def bit_reverse_permutation(n):
    """
    Generate bit-reversed indices for size n

    Built incrementally: rev[i] = rev[i >> 1] >> 1, plus the top bit n/2
    when i is odd. O(n) total.

    Example: n=8 -> [0, 4, 2, 6, 1, 5, 3, 7]
    """
    rev = np.zeros(n, dtype=np.int64)
    half = n >> 1
    for i in range(1, n):
        rev[i] = (rev[i >> 1] >> 1) | (half if i & 1 else 0)
    return rev


def apply_bit_reversal(seq, rev=None):
    """
    Permute seq into bit-reversed order, in place

    Each pair (i, rev[i]) with i < rev[i] is swapped exactly once, so applying
    this twice restores the original ordering.
    """
    if rev is None:
        rev = bit_reverse_permutation(len(seq))
    for i in range(len(seq)):
        j = int(rev[i])
        if i < j:
            seq[i], seq[j] = seq[j], seq[i]
