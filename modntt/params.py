"""
Field parameters for the NTT engine
MODULUS = 998244353 = 2^23 * 7 * 17 + 1 (prime), PRIMITIVE_ROOT = 3

Every power-of-two length up to 2^23 divides MODULUS - 1, so a principal
n-th root of unity exists for all of them.
"""

import math

# NTT Parameters
MODULUS = 998244353
PRIMITIVE_ROOT = 3          # Generator of the multiplicative group (order MODULUS - 1)
MODULUS_FACTORS = {2: 23, 7: 1, 17: 1}
MAX_TRANSFORM_LENGTH = 1 << MODULUS_FACTORS[2]


def is_power_of_two(n):
    """True for n = 1, 2, 4, 8, ..."""
    return n > 0 and n & (n - 1) == 0


def is_prime(q):
    """Trial division, fine for a 30-bit modulus"""
    if q < 2:
        return False
    if q % 2 == 0:
        return q == 2
    for d in range(3, math.isqrt(q) + 1, 2):
        if q % d == 0:
            return False
    return True


def is_primitive_root(g, modulus=MODULUS, factors=MODULUS_FACTORS):
    """
    Check that g generates the multiplicative group mod a prime modulus

    g is a generator iff g^((modulus-1)/p) != 1 for every prime p
    dividing modulus - 1.
    """
    if g % modulus == 0:
        return False
    order = modulus - 1
    return all(pow(g, order // p, modulus) != 1 for p in factors)


def root_of_unity(n, primitive_root=PRIMITIVE_ROOT, modulus=MODULUS):
    """
    Principal n-th root of unity: primitive_root^((modulus-1)/n)

    Args:
        n: Transform length, must divide modulus - 1
        primitive_root: Generator of the multiplicative group
        modulus: Prime modulus

    Returns:
        ω with ω^n ≡ 1 and ω^(n/2) ≡ -1 (for even n)
    """
    if n <= 0 or (modulus - 1) % n != 0:
        raise ValueError(f"No {n}-th root of unity mod {modulus}")
    return pow(primitive_root, (modulus - 1) // n, modulus)
