# bigarith

`bigarith` is a set of big-integer helpers for cryptographic code. Every
function works on Python's built-in `int`. The package covers:

- modular arithmetic and the extended GCD
- probabilistic primality testing and prime search
- secure random sampling
- byte, hex and radix conversions
- serialization to bytes or hex

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

## Modules

### `bigarith.convert`

- `to_bytes(n)` returns the big-endian bytes of `abs(n)`. Zero is encoded as a single zero byte.
- `from_bytes(data)` builds a non-negative integer from big-endian bytes.
- `to_bytes_array(n, length)` returns the bytes of `n` left-padded with zeros to `length`. It returns `None` when `n` needs more than `length` bytes.
- `to_str_radix(n, radix)` formats `n` with lower-case digits and a leading `-` for negatives.
- `from_str_radix(text, radix)` parses text and accepts an optional sign and `_` separators between digits. It raises `ParseBigIntError` for malformed input. It raises `ValueError` when the radix is outside `[2; 36]`.
- `to_hex(n)` and `from_hex(text)` are the radix-16 forms of the two functions above.

### `bigarith.modular`

- `mod_add`, `mod_sub` and `mod_mul` reduce each operand and then the result, using floored modulo.
- `mod_pow(base, exponent, modulus)` raises `ValueError` for a negative exponent.
- `mod_reduce(value, modulus)` takes a truncating remainder and shifts a negative remainder up by `modulus`.
- `mod_inv(a, modulus)` returns the inverse reduced by `mod_reduce`. It returns `None` when `a` and `modulus` are not coprime.
- `egcd(a, b)` returns `(g, p, q)` such that `g == a*p + b*q`, where `g` is the non-negative gcd.

### `bigarith.ring_algorithms`

- `normalized_extended_euclidean_algorithm(x, y)` is the extended Euclidean algorithm with a non-negative gcd.
- `modulo_inverse(a, m)` returns an unreduced inverse, or `None`.

### `bigarith.primes`

- `probably_prime(x, n)` tests a non-negative `x`. It runs `n` Miller–Rabin rounds with pseudo-random bases seeded from `x`, plus one round with base 2, followed by a Lucas test (Baillie-PSW). The result is exact for `x < 2**64`.
- `is_probable_prime(x, n)` does the same, and returns `False` for any non-positive `x`.
- `probably_prime_miller_rabin(n, reps, force2)` and `probably_prime_lucas(n)` run the two tests separately.
- `next_prime(n)` returns the smallest probable prime greater than `n`. For `n < 2` it returns `2`.
- `jacobi(x, y)` returns the Jacobi symbol. It raises `ValueError` when `y` is even.

### `bigarith.integer`

- `set_bit(n, bit, value)` returns a new integer with the bit set or cleared.
- `test_bit(n, bit)` reports whether the bit is set.
- `sqrt`, `cbrt` and `nth_root(n, k)` return integer roots truncated toward zero. Negative `n` is allowed only for odd `k`.
- `div_rem` divides with truncation, and `div_mod_floor` divides with flooring.
- `div_ceil` rounds the quotient up.
- `next_multiple_of` and `prev_multiple_of` round `a` to a multiple of `b`.
- `to_u64(n)` and `to_i64(n)` return `n` if it fits in the fixed-width type. Otherwise they raise `TryFromBigIntError`.

### `bigarith.sampling`

All of these functions draw from the `secrets` module.

- `sample(bit_size)` returns a value in `[0, 2**bit_size)`.
- `strict_sample(bit_size)` returns a value of exactly `bit_size` bits.
- `sample_below(upper)` returns a value in `[0, upper)`.
- `sample_range(lower, upper)` returns a value in `[lower, upper)`.
- `strict_sample_range(lower, upper)` returns a value in `(lower, upper)`.

Invalid bounds raise `ValueError`.

### `bigarith.encoding`

- `serialize(n, human_readable=False)` returns the magnitude bytes, or a lower-case hex string when `human_readable` is true.
- `deserialize(value)` accepts bytes, a hex string, or an iterable of byte values. It raises `ValueError` on malformed input.

### `bigarith.errors`

- `ParseBigIntError` is a subclass of `ValueError` and carries `radix`.
- `TryFromBigIntError` is a subclass of `OverflowError` and carries `type_name`.

## Example

```python
from bigarith.convert import to_hex, from_bytes
from bigarith.modular import mod_inv, egcd
from bigarith.primes import is_probable_prime, next_prime
from bigarith.sampling import sample_below

assert to_hex(1_000_000) == "f4240"
assert from_bytes(b"\x0f\x42\x40") == 1_000_000
assert egcd(10, 15)[0] == 5
assert mod_inv(64, 58) is None
assert is_probable_prime(2**255 - 19, 20)
assert next_prime(14) == 17
assert 0 <= sample_below(500) < 500
```

## What it does not do

`bigarith` is a library of integer functions only. It has:

- no command-line tool
- no elliptic-curve groups
- no commitment, proof or key-exchange schemes built on top of these functions

## Running the tests

```
pip install .[test]
pytest
```