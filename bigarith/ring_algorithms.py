"""Extended Euclidean algorithm and modular inversion."""

from __future__ import annotations


def normalized_extended_euclidean_algorithm(x: int, y: int) -> tuple[int, int, int]:
    """Return ``(g, s, t)`` with ``g = x*s + y*t`` and ``g`` the non-negative gcd."""
    old = (abs(x), -1 if x < 0 else 1, 0)
    now = (abs(y), 0, -1 if y < 0 else 1)
    while now[0] != 0:
        q, r = divmod(old[0], now[0])
        old, now = now, (r, old[1] - q * now[1], old[2] - q * now[2])
    return old


def modulo_inverse(a: int, m: int) -> int | None:
    """Return some ``x`` with ``a*x = 1 (mod m)``, or ``None`` if none exists.

    The result is not reduced into ``[0, m)``.
    """
    gcd, inv_a, _ = normalized_extended_euclidean_algorithm(a, m)
    return inv_a if gcd == 1 else None