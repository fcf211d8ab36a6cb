"""Number-Theoretic Transform and polynomial multiplication mod 998244353."""

from .params import MAX_TRANSFORM_LENGTH, MODULUS, PRIMITIVE_ROOT
from .modarith import mod_inv, power_mod
from .bitrev import apply_bit_reversal, bit_reverse, bit_reverse_permutation
from .transform import ForwardTransform, intt, ntt
from .convolution import convolve, multiply_polynomials, pointwise_multiply

__all__ = [
    "MODULUS",
    "PRIMITIVE_ROOT",
    "MAX_TRANSFORM_LENGTH",
    "power_mod",
    "mod_inv",
    "bit_reverse",
    "bit_reverse_permutation",
    "apply_bit_reversal",
    "ForwardTransform",
    "ntt",
    "intt",
    "pointwise_multiply",
    "convolve",
    "multiply_polynomials",
]
