"""Naive reference implementations for tests."""

from .naive_reference import cyclic_convolution, naive_ntt, schoolbook_multiply

__all__ = [
    "naive_ntt",
    "cyclic_convolution",
    "schoolbook_multiply",
]
