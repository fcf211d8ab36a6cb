"""
Modular arithmetic primitives for the NTT engine

Exponentiation by squaring and Fermat inversion under a prime modulus.
"""

from .params import MODULUS


def power_mod(base, exponent, modulus):
    """
    Modular exponentiation (binary, right-to-left)

    Args:
        base: Integer base
        exponent: Non-negative exponent
        modulus: Positive modulus

    Returns:
        base^exponent mod modulus, fully reduced into [0, modulus)
    """
    if exponent < 0:
        raise ValueError(f"Exponent must be non-negative, got {exponent}")
    result = 1 % modulus
    base = base % modulus
    while exponent > 0:
        if exponent % 2 == 1:
            result = (result * base) % modulus
        exponent = exponent >> 1
        base = (base * base) % modulus
    return result


def mod_inv(value, modulus=MODULUS):
    """Modular inverse via Fermat's little theorem (modulus must be prime)"""
    if value % modulus == 0:
        raise ValueError(f"{value} has no inverse mod {modulus}")
    return power_mod(value, modulus - 2, modulus)
