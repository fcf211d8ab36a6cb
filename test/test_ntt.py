"""
Tests for the forward and inverse NTT
Both butterfly networks (CT, GS) against each other and a naive DFT
"""

import random

import numpy as np
import pytest

from modntt.params import MODULUS, PRIMITIVE_ROOT
from modntt.transform import ForwardTransform, intt, ntt
from refs import naive_ntt

VARIANTS = [ForwardTransform.CT, ForwardTransform.GS]


def random_poly(n):
    return [random.randint(0, MODULUS - 1) for _ in range(n)]


@pytest.mark.parametrize("variant", VARIANTS)
def test_round_trip_known_vector(variant):
    """[1..8] -> NTT -> INTT -> [1..8]"""
    coeffs = [1, 2, 3, 4, 5, 6, 7, 8]
    ntt(coeffs, 8, PRIMITIVE_ROOT, variant)
    assert coeffs != [1, 2, 3, 4, 5, 6, 7, 8]
    intt(coeffs, 8, PRIMITIVE_ROOT)
    assert coeffs == [1, 2, 3, 4, 5, 6, 7, 8]


@pytest.mark.parametrize("variant", VARIANTS)
@pytest.mark.parametrize("log_n", range(0, 11))
def test_round_trip_random(variant, log_n):
    random.seed(42)
    n = 1 << log_n
    poly = random_poly(n)
    work = list(poly)
    ntt(work, n, variant=variant)
    assert all(0 <= v < MODULUS for v in work), "Forward output not fully reduced"
    intt(work, n)
    assert work == poly, f"Round-trip failed for n={n}, variant={variant.name}"


@pytest.mark.parametrize("variant", VARIANTS)
@pytest.mark.parametrize("log_n", range(0, 7))
def test_matches_naive_dft(variant, log_n):
    random.seed(42)
    n = 1 << log_n
    poly = random_poly(n)
    expected = naive_ntt(poly)
    ntt(poly, n, variant=variant)
    assert poly == expected


@pytest.mark.parametrize("log_n", [3, 5, 9])
def test_variants_agree(log_n):
    random.seed(42)
    n = 1 << log_n
    a = random_poly(n)
    b = list(a)
    ntt(a, n, variant=ForwardTransform.CT)
    ntt(b, n, variant=ForwardTransform.GS)
    assert a == b


@pytest.mark.parametrize("variant", VARIANTS)
def test_impulse_and_constant(variant):
    """Impulse at 0 -> all ones; all ones -> [n, 0, 0, ...]"""
    n = 16
    impulse = [1] + [0] * (n - 1)
    ntt(impulse, n, variant=variant)
    assert impulse == [1] * n

    ones = [1] * n
    ntt(ones, n, variant=variant)
    assert ones == [n] + [0] * (n - 1)

    zeros = [0] * n
    ntt(zeros, n, variant=variant)
    assert zeros == [0] * n


def test_variant_accepts_string_tag():
    a = [1, 2, 3, 4]
    b = [1, 2, 3, 4]
    ntt(a, 4, variant="gs")
    ntt(b, 4, variant=ForwardTransform.GS)
    assert a == b


@pytest.mark.parametrize("variant", VARIANTS)
def test_ndarray_in_place(variant):
    """int64 buffers work: (Q-1)^2 fits before reduction"""
    random.seed(42)
    n = 64
    poly = np.array(random_poly(n), dtype=np.int64)
    work = poly.copy()
    ntt(work, n, variant=variant)
    assert work.dtype == np.int64
    assert not np.array_equal(work, poly)
    intt(work, n)
    assert np.array_equal(work, poly)


def test_extreme_values_stay_reduced():
    n = 32
    a = [MODULUS - 1] * n
    ntt(a, n)
    assert a == [(MODULUS - 1) * n % MODULUS] + [0] * (n - 1)
    intt(a, n)
    assert a == [MODULUS - 1] * n


@pytest.mark.parametrize("n", [0, 3, 6, 12, -4])
def test_invalid_length_rejected(n):
    with pytest.raises(ValueError, match="invalid transform length"):
        ntt([0] * max(n, 0), n)
    with pytest.raises(ValueError, match="invalid transform length"):
        intt([0] * max(n, 0), n)


def test_length_above_supported_maximum_rejected():
    with pytest.raises(ValueError, match="invalid transform length"):
        ntt([], 1 << 24)


def test_length_mismatch_rejected():
    with pytest.raises(ValueError, match="invalid transform length"):
        ntt([1, 2, 3], 4)
    with pytest.raises(ValueError, match="invalid transform length"):
        intt([1, 2, 3, 4, 5, 6, 7, 8], 4)


@pytest.mark.parametrize("variant", VARIANTS)
def test_length_one_output_reduced(variant):
    a = [MODULUS + 5]
    ntt(a, 1, variant=variant)
    assert a == [5]
    b = [2 * MODULUS + 7]
    intt(b, 1)
    assert b == [7]
