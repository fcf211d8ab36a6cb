#!/usr/bin/env python3
"""
Verify the NTT field parameters
For the transform over GF(MODULUS) we need:
- MODULUS prime, MODULUS - 1 = 2^23 * 7 * 17
- PRIMITIVE_ROOT a generator of the multiplicative group
- ω = g^((MODULUS-1)/n) with ω^n ≡ 1 and ω^(n/2) ≡ -1 for each length n
"""

import argparse
import logging

from modntt.modarith import mod_inv, power_mod
from modntt.params import (
    MAX_TRANSFORM_LENGTH,
    MODULUS,
    MODULUS_FACTORS,
    PRIMITIVE_ROOT,
    is_prime,
    is_primitive_root,
    root_of_unity,
)


def verify_field():
    """Check MODULUS and PRIMITIVE_ROOT"""
    print(f"Parameters: Q={MODULUS}, g={PRIMITIVE_ROOT}")

    order = 1
    for p, e in MODULUS_FACTORS.items():
        order *= p ** e

    checks = [
        ("Q is prime", is_prime(MODULUS)),
        ("Q - 1 = 2^23 * 7 * 17", order == MODULUS - 1),
        ("g^(Q-1) ≡ 1 (mod Q)", power_mod(PRIMITIVE_ROOT, MODULUS - 1, MODULUS) == 1),
        ("g generates GF(Q)*", is_primitive_root(PRIMITIVE_ROOT)),
    ]
    for name, ok in checks:
        print(f"  {name}: {'✓' if ok else '✗'}")
    return all(ok for _, ok in checks)


def verify_length(n):
    """Check the principal n-th root of unity for one transform length"""
    omega = root_of_unity(n)
    omega_inv = mod_inv(omega)

    cond1 = pow(omega, n, MODULUS) == 1
    cond2 = n == 1 or pow(omega, n // 2, MODULUS) == MODULUS - 1
    cond3 = omega * omega_inv % MODULUS == 1

    print(f"Verifying ω for N={n}")
    print(f"  ω = g^((Q-1)/{n}) = {omega}")
    print(f"  ω^(-1) = {omega_inv}")
    print(f"  ω^{n} ≡ 1: {'✓' if cond1 else '✗'}")
    print(f"  ω^{n // 2} ≡ -1: {'✓' if cond2 else '✗'}")
    print(f"  ω × ω^(-1) ≡ 1: {'✓' if cond3 else '✗'}")
    return cond1 and cond2 and cond3


def main(argv=None):
    parser = argparse.ArgumentParser(description="Verify NTT field parameters")
    parser.add_argument("-n", "--length", type=int, action="append",
                        help="Transform length to check (repeatable, default 8 and 2^23)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    lengths = args.length or [8, MAX_TRANSFORM_LENGTH]
    for n in lengths:
        if n <= 0 or n & (n - 1) or n > MAX_TRANSFORM_LENGTH:
            parser.error(f"invalid transform length {n}")

    print("=" * 60)
    print("NTT Parameter Check")
    print("=" * 60)
    passed = verify_field()
    for n in lengths:
        print()
        passed = verify_length(n) and passed

    print()
    print(f"{'✓ All checks passed' if passed else '✗ Parameter check FAILED'}")
    return 0 if passed else 1


if __name__ == "__main__":
    raise SystemExit(main())
