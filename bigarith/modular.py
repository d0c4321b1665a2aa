"""Modular arithmetic and the extended gcd."""

from __future__ import annotations

from bigarith.ring_algorithms import (
    modulo_inverse,
    normalized_extended_euclidean_algorithm,
)


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """Return ``base**exponent mod modulus``; the exponent must be non-negative."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    return pow(base, exponent, modulus)


def mod_mul(a: int, b: int, modulus: int) -> int:
    """Return ``a*b mod modulus`` (floored)."""
    return (a % modulus) * (b % modulus) % modulus


def mod_sub(a: int, b: int, modulus: int) -> int:
    """Return ``a-b mod modulus`` (floored)."""
    return ((a % modulus) - (b % modulus) + modulus) % modulus


def mod_add(a: int, b: int, modulus: int) -> int:
    """Return ``a+b mod modulus`` (floored)."""
    return ((a % modulus) + (b % modulus)) % modulus


def mod_reduce(value: int, modulus: int) -> int:
    """Reduce ``value`` by ``modulus``, shifting a negative remainder up by ``modulus``.

    The remainder is taken with truncating division, so for a positive
    modulus the result lies in ``[0, modulus)``.
    """
    if modulus == 0:
        raise ZeroDivisionError("modulus must be non-zero")
    rem = abs(value) % abs(modulus)
    if value < 0:
        rem = -rem
    return modulus + rem if rem < 0 else rem


def mod_inv(a: int, modulus: int) -> int | None:
    """Return ``a**-1 mod modulus``, or ``None`` if ``a`` and ``modulus`` are not coprime."""
    inv = modulo_inverse(a, modulus)
    if inv is None:
        return None
    return mod_reduce(inv, modulus)


def egcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, p, q)`` with ``g = gcd(a, b) = a*p + b*q``."""
    return normalized_extended_euclidean_algorithm(a, b)