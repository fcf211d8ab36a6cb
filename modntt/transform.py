"""
In-place Number-Theoretic Transform over GF(MODULUS)

Two forward variants share one signature and one output convention
(natural-order NTT image, X_k = sum_j a_j * w^(jk) with w the principal n-th
root of unity):

    CT: bit-reverse the input, then decimation-in-time butterflies
        (A + W*B, A - W*B), block size 2 -> n
    GS: decimation-in-frequency butterflies ((A + B), (A - B)*W),
        block size n -> 2, then bit-reverse the output

`intt` runs the CT pass with the inverse root and scales by n^(-1), so it
undoes either variant exactly.
"""

import enum
import logging

from .bitrev import apply_bit_reversal, bit_reverse_permutation
from .modarith import power_mod
from .params import MAX_TRANSFORM_LENGTH, MODULUS, PRIMITIVE_ROOT, is_power_of_two

log = logging.getLogger(__name__)


class ForwardTransform(enum.Enum):
    """Butterfly network used by the forward transform"""
    CT = "ct"   # Cooley-Tukey, decimation-in-time
    GS = "gs"   # Gentleman-Sande, decimation-in-frequency


def check_transform_length(seq, n):
    """Fail fast on lengths the transform cannot handle"""
    if not is_power_of_two(n) or n > MAX_TRANSFORM_LENGTH:
        raise ValueError(
            f"invalid transform length {n}: must be a power of two <= {MAX_TRANSFORM_LENGTH}")
    if len(seq) != n:
        raise ValueError(f"invalid transform length: sequence has {len(seq)} elements, expected {n}")


def _ct_butterflies(a, n, primitive_root):
    mh = 2
    while mh <= n:
        m = mh >> 1
        # Principal mh-th root of unity for this stage
        base = power_mod(primitive_root, (MODULUS - 1) // mh, MODULUS)
        w = 1
        for j in range(m):
            for k in range(0, n, mh):
                u = int(a[k + j])
                t = int(a[k + j + m]) * w % MODULUS
                a[k + j] = (u + t) % MODULUS
                a[k + j + m] = (u + MODULUS - t) % MODULUS
            w = w * base % MODULUS
        mh <<= 1


def _gs_butterflies(a, n, primitive_root):
    m = n
    base = power_mod(primitive_root, (MODULUS - 1) // n, MODULUS)
    while m > 2:
        m >>= 1
        for r in range(0, n, 2 * m):
            w = 1
            for s in range(r, r + m):
                u = int(a[s])
                d = int(a[s + m])
                a[s] = (u + d) % MODULUS
                a[s + m] = w * ((u + MODULUS - d) % MODULUS) % MODULUS
                w = w * base % MODULUS
        base = base * base % MODULUS
    if m > 1:
        # m = 1: twiddle is always 1
        for r in range(0, n, 2):
            u = int(a[r])
            d = int(a[r + 1])
            a[r] = (u + d) % MODULUS
            a[r + 1] = (u + MODULUS - d) % MODULUS


def ntt(a, n, primitive_root=PRIMITIVE_ROOT, variant=ForwardTransform.CT):
    """
    Forward NTT, in place

    Args:
        a: Mutable sequence (list or 1-D integer ndarray) of n reduced values
        n: Transform length, power of two up to MAX_TRANSFORM_LENGTH
        primitive_root: Generator used to derive the roots of unity
        variant: ForwardTransform.CT or ForwardTransform.GS

    Input: Normal Order (NO)
    Output: Normal Order (NO)
    """
    check_transform_length(a, n)
    variant = ForwardTransform(variant)
    log.debug("forward NTT n=%d root=%d variant=%s", n, primitive_root, variant.name)

    if n == 1:
        # No butterfly stages: only reduce
        a[0] = int(a[0]) % MODULUS
        return

    rev = bit_reverse_permutation(n)
    if variant is ForwardTransform.CT:
        apply_bit_reversal(a, rev)
        _ct_butterflies(a, n, primitive_root)
    else:
        _gs_butterflies(a, n, primitive_root)
        apply_bit_reversal(a, rev)


def intt(a, n, primitive_root=PRIMITIVE_ROOT):
    """
    Inverse NTT, in place

    CT pass with root^(-1), then final scaling by n^(-1).
    """
    check_transform_length(a, n)
    log.debug("inverse NTT n=%d root=%d", n, primitive_root)

    n_inv = power_mod(n, MODULUS - 2, MODULUS)
    ntt(a, n, power_mod(primitive_root, MODULUS - 2, MODULUS), ForwardTransform.CT)
    for i in range(n):
        a[i] = int(a[i]) * n_inv % MODULUS
