"""Probabilistic primality testing and prime search."""

from __future__ import annotations

import math
import random

_NUMBER_OF_PRIMES = 127

_PRIME_GAP = (
    2, 2, 4, 2, 4, 2, 4, 6, 2, 6, 4, 2, 4, 6, 6, 2, 6, 4, 2, 6, 4, 6, 8, 4, 2, 4, 2, 4, 14, 4, 6,
    2, 10, 2, 6, 6, 4, 6, 6, 2, 10, 2, 4, 2, 12, 12, 4, 2, 4, 6, 2, 10, 6, 6, 6, 2, 6, 4, 2, 10,
    14, 4, 2, 4, 14, 6, 10, 2, 4, 6, 8, 6, 6, 4, 6, 8, 4, 8, 10, 2, 10, 2, 6, 4, 6, 8, 4, 2, 4, 12,
    8, 4, 8, 4, 6, 12, 2, 18, 6, 10, 6, 6, 2, 6, 10, 6, 6, 2, 6, 6, 4, 2, 12, 10, 2, 4, 6, 6, 2,
    12, 4, 6, 8, 10, 8, 10, 8, 6, 6, 4, 8, 6, 4, 8, 4, 14, 10, 12, 2, 10, 2, 4, 2, 10, 14, 4, 2, 4,
    14, 4, 2, 4, 20, 4, 8, 10, 8, 4, 6, 6, 14, 4, 6, 6, 8, 6, 12,
)


def _odd_primes_from_gaps() -> tuple[int, ...]:
    primes = []
    prime = 3
    for gap in _PRIME_GAP:
        primes.append(prime)
        prime += gap
    return tuple(primes)


_SMALL_ODD_PRIMES = _odd_primes_from_gaps()

_INCR_LIMIT = 0x10000

_PRIME_BIT_MASK = sum(
    1 << p for p in (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59, 61)
)

_PRIMES_A = 3 * 5 * 7 * 11 * 13 * 17 * 19 * 23 * 37
_PRIMES_B = 29 * 31 * 41 * 43 * 47 * 53
_FACTORS_A = (3, 5, 7, 11, 13, 17, 19, 23, 37)
_FACTORS_B = (29, 31, 41, 43, 47, 53)


def _trailing_zeros(n: int) -> int:
    return (n & -n).bit_length() - 1


def probably_prime(x: int, n: int) -> bool:
    """Report whether non-negative ``x`` is probably prime.

    Applies Miller-Rabin with ``n`` pseudo-random bases plus a base-2 round,
    followed by a Lucas test (Baillie-PSW). Exact for ``x < 2**64``.
    """
    if x == 0:
        return False
    if x < 64:
        return bool(_PRIME_BIT_MASK & (1 << x))
    if x % 2 == 0:
        return False

    r_a = x % _PRIMES_A
    r_b = x % _PRIMES_B
    if any(r_a % p == 0 for p in _FACTORS_A) or any(r_b % p == 0 for p in _FACTORS_B):
        return False

    return probably_prime_miller_rabin(x, n + 1, True) and probably_prime_lucas(x)


def probably_prime_miller_rabin(n: int, reps: int, force2: bool) -> bool:
    """Report whether ``n`` passes ``reps`` Miller-Rabin rounds.

    Bases are chosen pseudo-randomly from a generator seeded by ``n``; if
    ``force2`` is true the last round uses base 2.
    """
    nm1 = n - 1
    k = _trailing_zeros(nm1)
    q = nm1 >> k
    nm3 = n - 3
    rng = random.Random(n)

    for i in range(reps):
        if i == reps - 1 and force2:
            base = 2
        else:
            base = rng.randrange(nm3) + 2

        y = pow(base, q, n)
        if y == 1 or y == nm1:
            continue

        for _ in range(1, k):
            y = pow(y, 2, n)
            if y == nm1:
                break
            if y == 1:
                return False
        else:
            return False

    return True


def probably_prime_lucas(n: int) -> bool:
    """Report whether ``n`` passes the almost extra strong Lucas test."""
    if n in (0, 1, 2):
        return False

    p = 3
    while True:
        if p > 10000:
            raise RuntimeError(f"internal error: cannot find (D/n) = -1 for {n}")
        j = jacobi(p * p - 4, n)
        if j == -1:
            break
        if j == 0:
            return n == p + 2
        if p == 40 and math.isqrt(n) ** 2 == n:
            return False
        p += 1

    s = n + 1
    r = _trailing_zeros(s)
    s >>= r
    nm2 = n - 2

    vk = 2
    vk1 = p
    for i in reversed(range(s.bit_length())):
        if (s >> i) & 1:
            vk = (vk * vk1 + n - p) % n
            vk1 = (vk1 * vk1 + nm2) % n
        else:
            vk1 = (vk * vk1 + n - p) % n
            vk = (vk * vk + nm2) % n

    if vk == 2 or vk == nm2:
        if abs(vk * p - (vk1 << 1)) % n == 0:
            return True

    for _ in range(r - 1):
        if vk == 0:
            return True
        if vk == 2:
            return False
        vk = (vk * vk - 2) % n

    return False


def next_prime(n: int) -> int:
    """Return the smallest probable prime strictly greater than ``n``."""
    if n < 2:
        return 2

    res = (n + 1) | 1
    if res < 7:
        return res

    nbits = res.bit_length()
    prime_limit = min(nbits // 2, _NUMBER_OF_PRIMES - 1)
    small = _SMALL_ODD_PRIMES[:prime_limit]

    while True:
        residues = [(res % p, p) for p in small]
        for incr in range(0, _INCR_LIMIT, 2):
            if all((r + incr) % p for r, p in residues):
                candidate = res + incr
                if probably_prime(candidate, 20):
                    return candidate
        res += _INCR_LIMIT


def jacobi(x: int, y: int) -> int:
    """Return the Jacobi symbol ``(x/y)``; ``y`` must be odd."""
    if y % 2 == 0:
        raise ValueError(f"invalid arguments, y must be an odd integer, but got {y}")

    a, b = x, y
    j = 1
    if b < 0:
        if a < 0:
            j = -1
        b = -b

    while True:
        if b == 1:
            return j
        if a == 0:
            return 0
        a %= b
        if a == 0:
            return 0

        s = _trailing_zeros(a)
        if s & 1 and (b & 7) in (3, 5):
            j = -j

        c = a >> s
        if b & 3 == 3 and c & 3 == 3:
            j = -j

        a, b = b, c


def is_probable_prime(x: int, n: int) -> bool:
    """Signed wrapper around :func:`probably_prime`: non-positive values are not prime."""
    if x <= 0:
        return False
    return probably_prime(x, n)