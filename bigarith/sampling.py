"""Cryptographically secure random integer sampling."""

from __future__ import annotations

import secrets

from bigarith.convert import from_bytes


def sample(bit_size: int) -> int:
    """Return a random integer in ``[0, 2**bit_size)``."""
    if bit_size < 0:
        raise ValueError(f"bit size must be non-negative, got {bit_size}")
    if bit_size == 0:
        return 0
    size = (bit_size - 1) // 8 + 1
    return from_bytes(secrets.token_bytes(size)) >> (size * 8 - bit_size)


def strict_sample(bit_size: int) -> int:
    """Return a random integer in ``[2**(bit_size-1), 2**bit_size)``."""
    if bit_size == 0:
        return 0
    while True:
        n = sample(bit_size)
        if n.bit_length() == bit_size:
            return n


def sample_below(upper: int) -> int:
    """Return a random integer in ``[0, upper)``; ``upper`` must be positive."""
    if upper <= 0:
        raise ValueError("upper bound must be positive")
    bits = upper.bit_length()
    while True:
        n = sample(bits)
        if n < upper:
            return n


def sample_range(lower: int, upper: int) -> int:
    """Return a random integer in ``[lower, upper)``."""
    if upper <= lower:
        raise ValueError("upper bound must exceed lower bound")
    return lower + sample_below(upper - lower)


def strict_sample_range(lower: int, upper: int) -> int:
    """Return a random integer in the open range ``(lower, upper)``."""
    if upper <= lower:
        raise ValueError("upper bound must exceed lower bound")
    if upper - lower < 2:
        raise ValueError("no integer lies strictly between the bounds")
    while True:
        n = lower + sample_below(upper - lower)
        if lower < n < upper:
            return n