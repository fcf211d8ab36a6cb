#!/usr/bin/env python3
"""
Polynomial multiplication mod 998244353 using the NTT engine

Examples:
  poly_mult.py 1,2,3 4,5          # (1 + 2x + 3x^2)(4 + 5x)
  poly_mult.py 1,1 1,-1 --variant gs
  poly_mult.py --demo -v          # round-trip and convolution demonstrations
"""

import argparse
import logging

from modntt import MODULUS, PRIMITIVE_ROOT, ForwardTransform, convolve, intt, multiply_polynomials, ntt


def parse_coeffs(text):
    """'1,2,-3' -> [1, 2, MODULUS - 3]"""
    try:
        return [int(tok) % MODULUS for tok in text.split(",") if tok.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a comma-separated integer list: {text!r}") from None


def run_demo(variant):
    """Round-trip [1..8] and the 8-point convolution scenario"""
    passed = True

    print("Round-trip")
    print("-" * 60)
    coeffs = [1, 2, 3, 4, 5, 6, 7, 8]
    original = list(coeffs)
    n = len(coeffs)
    ntt(coeffs, n, PRIMITIVE_ROOT, variant)
    print(f"  NTT:         {coeffs}")
    intt(coeffs, n, PRIMITIVE_ROOT)
    print(f"  Inverse NTT: {coeffs}")
    ok = coeffs == original
    passed = passed and ok
    print(f"  {'✓' if ok else '✗'} Round-trip {'successful' if ok else 'mismatch'}")

    print()
    print("Cyclic convolution (n=8)")
    print("-" * 60)
    vec0 = [4, 1, 4, 2, 1, 3, 5, 6]
    vec1 = [6, 1, 8, 0, 3, 3, 9, 8]
    expected = [123, 120, 106, 92, 139, 144, 140, 124]
    result = convolve(vec0, vec1, 8, variant)
    print(f"  Result:   {result}")
    print(f"  Expected: {expected}")
    ok = result == expected
    passed = passed and ok
    print(f"  {'✓' if ok else '✗'} Convolution {'matches' if ok else 'MISMATCH'}")
    return passed


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Multiply two polynomials mod 998244353 with the NTT",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split("Examples:", 1)[1],
    )
    parser.add_argument("a", nargs="?", type=parse_coeffs, help="Coefficients of A, lowest degree first")
    parser.add_argument("b", nargs="?", type=parse_coeffs, help="Coefficients of B, lowest degree first")
    parser.add_argument("--variant", choices=[v.value for v in ForwardTransform], default="ct",
                        help="Forward butterfly network (default: ct)")
    parser.add_argument("--demo", action="store_true", help="Run the demonstration scenarios")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    variant = ForwardTransform(args.variant)

    if args.demo:
        print("=" * 60)
        print(f"NTT demonstration (variant {variant.name})")
        print("=" * 60)
        return 0 if run_demo(variant) else 1

    if not args.a or not args.b:
        parser.error("two coefficient lists are required unless --demo is given")

    print(multiply_polynomials(args.a, args.b, variant))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
