import pytest
from hypothesis import given
from hypothesis import strategies as st

from bigarith.errors import TryFromBigIntError
from bigarith.integer import (
    cbrt,
    div_ceil,
    div_mod_floor,
    div_rem,
    next_multiple_of,
    nth_root,
    prev_multiple_of,
    set_bit,
    sqrt,
    test_bit as bit_is_set,
    to_i64,
    to_u64,
)


def test_count_bits_via_shifts():
    n = 1
    for expected_bits in range(1, 101):
        assert n.bit_length() == expected_bits
        assert bit_is_set(n, expected_bits - 1)
        n <<= 1


def test_bits():
    n = 0b1011001
    expectations = [True, False, True, True, False, False, True]
    for i, expect in enumerate(expectations):
        bit = 7 - i - 1
        assert bit_is_set(n, bit) == expect, f"testing {bit} bit"


def test_bit_doc_example():
    n = 0b101
    assert bit_is_set(n, 3) is False
    assert bit_is_set(n, 2) is True
    assert bit_is_set(n, 1) is False
    assert bit_is_set(n, 0) is True


def test_setting_bit():
    n = 0
    n = set_bit(n, 4, True)
    assert n == 0b10000
    n = set_bit(n, 1, True)
    assert n == 0b10010
    n = set_bit(n, 4, True)
    assert n == 0b10010
    n = set_bit(n, 4, False)
    assert n == 0b10
    n = set_bit(n, 2, False)
    assert n == 0b10
    n = set_bit(n, 1, False)
    assert n == 0


def test_set_bit_doc_example():
    n = 0b100
    n = set_bit(n, 3, True)
    assert n == 0b1100
    n = set_bit(n, 0, True)
    assert n == 0b1101
    n = set_bit(n, 2, False)
    assert n == 0b1001


def test_negative_bit_index_rejected():
    with pytest.raises(ValueError):
        set_bit(1, -1, True)
    with pytest.raises(ValueError):
        bit_is_set(1, -1)


@pytest.mark.parametrize(
    "n,k,expected",
    [(0, 2, 0), (1, 5, 1), (15, 2, 3), (16, 2, 4), (26, 3, 2), (27, 3, 3), (-27, 3, -3), (-28, 3, -3)],
)
def test_nth_root_values(n, k, expected):
    assert nth_root(n, k) == expected


def test_sqrt_and_cbrt():
    assert sqrt(10**40) == 10**20
    assert cbrt(10**30 + 1) == 10**10
    assert cbrt(-8) == -2


def test_root_errors():
    with pytest.raises(ValueError):
        nth_root(16, 0)
    with pytest.raises(ValueError):
        sqrt(-4)


@given(st.integers(min_value=0, max_value=2**300), st.integers(min_value=1, max_value=7))
def test_nth_root_bounds(n, k):
    r = nth_root(n, k)
    assert r**k <= n < (r + 1) ** k


def test_divisions():
    assert div_rem(-7, 2) == (-3, -1)
    assert div_rem(7, -2) == (-3, 1)
    assert div_mod_floor(-7, 2) == (-4, 1)
    assert div_ceil(7, 2) == 4
    assert div_ceil(-7, 2) == -3
    with pytest.raises(ZeroDivisionError):
        div_rem(1, 0)


@given(st.integers(), st.integers().filter(lambda b: b != 0))
def test_div_rem_invariant(a, b):
    q, r = div_rem(a, b)
    assert q * b + r == a
    assert abs(r) < abs(b)
    assert r == 0 or (r < 0) == (a < 0)


def test_multiples():
    assert next_multiple_of(16, 8) == 16
    assert next_multiple_of(23, 8) == 24
    assert next_multiple_of(-23, 8) == -16
    assert next_multiple_of(23, -8) == 16
    assert prev_multiple_of(23, 8) == 16
    assert prev_multiple_of(-23, 8) == -24
    assert prev_multiple_of(23, -8) == 24


def test_fixed_width_conversion():
    assert to_u64(2**64 - 1) == 2**64 - 1
    assert to_i64(-(2**63)) == -(2**63)
    with pytest.raises(TryFromBigIntError, match="u64"):
        to_u64(2**64)
    with pytest.raises(TryFromBigIntError):
        to_u64(-1)
    with pytest.raises(TryFromBigIntError, match="i64"):
        to_i64(2**63)