"""Integer helpers: bit manipulation, roots, divisions and fixed-width conversion."""

from __future__ import annotations

import math

from bigarith.errors import TryFromBigIntError

_U64_MAX = (1 << 64) - 1
_I64_MIN = -(1 << 63)
_I64_MAX = (1 << 63) - 1


def _check_bit_index(bit: int) -> None:
    if bit < 0:
        raise ValueError(f"bit index must be non-negative, got {bit}")


def set_bit(n: int, bit: int, value: bool) -> int:
    """Return ``n`` with the given bit set (``value`` true) or cleared."""
    _check_bit_index(bit)
    mask = 1 << bit
    return n | mask if value else n & ~mask


def test_bit(n: int, bit: int) -> bool:
    """Report whether the given bit of ``n`` is set."""
    _check_bit_index(bit)
    return bool((n >> bit) & 1)


def _iroot(x: int, k: int) -> int:
    """Floor of the k-th root of a non-negative integer."""
    if x < 2 or k == 1:
        return x
    if k == 2:
        return math.isqrt(x)
    guess = 1 << -(-x.bit_length() // k)
    while True:
        nxt = ((k - 1) * guess + x // guess ** (k - 1)) // k
        if nxt >= guess:
            return guess
        guess = nxt


def nth_root(n: int, k: int) -> int:
    """Return the k-th root of ``n``, truncated toward zero.

    Negative ``n`` is allowed only for odd ``k``.
    """
    if k <= 0:
        raise ValueError("root degree 0 is meaningless" if k == 0 else f"invalid root degree {k}")
    if n < 0:
        if k % 2 == 0:
            raise ValueError(f"root of degree {k} is imaginary")
        return -_iroot(-n, k)
    return _iroot(n, k)


def sqrt(n: int) -> int:
    """Return the integer square root of non-negative ``n``."""
    return nth_root(n, 2)


def cbrt(n: int) -> int:
    """Return the integer cube root of ``n``, truncated toward zero."""
    return nth_root(n, 3)


def div_rem(a: int, b: int) -> tuple[int, int]:
    """Return quotient and remainder of truncating division."""
    if b == 0:
        raise ZeroDivisionError("division by zero")
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - q * b


def div_mod_floor(a: int, b: int) -> tuple[int, int]:
    """Return quotient and remainder of floored division."""
    return divmod(a, b)


def div_ceil(a: int, b: int) -> int:
    """Return the quotient rounded toward positive infinity."""
    return -((-a) // b)


def next_multiple_of(a: int, b: int) -> int:
    """Return the smallest multiple of ``b`` not below ``a`` (in the direction of ``b``'s sign)."""
    m = a % b
    return a if m == 0 else a + (b - m)


def prev_multiple_of(a: int, b: int) -> int:
    """Return the multiple of ``b`` obtained by removing the floored remainder from ``a``."""
    return a - a % b


def to_u64(n: int) -> int:
    """Return ``n`` if it fits in an unsigned 64-bit integer, otherwise raise."""
    if not 0 <= n <= _U64_MAX:
        raise TryFromBigIntError("u64")
    return n


def to_i64(n: int) -> int:
    """Return ``n`` if it fits in a signed 64-bit integer, otherwise raise."""
    if not _I64_MIN <= n <= _I64_MAX:
        raise TryFromBigIntError("i64")
    return n