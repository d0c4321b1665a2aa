"""Conversions between integers and their byte and text representations."""

from __future__ import annotations

import string

from bigarith.errors import ParseBigIntError

_DIGITS = string.digits + string.ascii_lowercase


def _check_radix(radix: int) -> None:
    if not 2 <= radix <= 36:
        raise ValueError(f"radix must be within [2; 36], got {radix}")


def to_bytes(n: int) -> bytes:
    """Return the big-endian bytes of ``abs(n)``; zero encodes as a single zero byte."""
    magnitude = abs(n)
    length = max(1, (magnitude.bit_length() + 7) // 8)
    return magnitude.to_bytes(length, "big")


def from_bytes(data: bytes) -> int:
    """Build a non-negative integer from big-endian bytes."""
    return int.from_bytes(bytes(data), "big")


def to_bytes_array(n: int, length: int) -> bytes | None:
    """Return the bytes of ``n`` left-padded with zeros to ``length``.

    Returns ``None`` when ``n`` needs more than ``length`` bytes.
    """
    data = to_bytes(n)
    if len(data) > length:
        return None
    return data.rjust(length, b"\x00")


def to_str_radix(n: int, radix: int) -> str:
    """Format ``n`` in the given radix with lower-case digits and a leading ``-`` if negative."""
    _check_radix(radix)
    sign = "-" if n < 0 else ""
    magnitude = abs(n)
    if radix == 10:
        return sign + str(magnitude)
    if radix == 16:
        return sign + format(magnitude, "x")
    if radix == 8:
        return sign + format(magnitude, "o")
    if radix == 2:
        return sign + format(magnitude, "b")
    if magnitude == 0:
        return "0"
    digits = []
    while magnitude:
        magnitude, d = divmod(magnitude, radix)
        digits.append(_DIGITS[d])
    return sign + "".join(reversed(digits))


def from_str_radix(text: str, radix: int) -> int:
    """Parse ``text`` as an integer in ``radix``.

    An optional leading sign is accepted, and underscores may separate digits
    (but not start them). Raises :class:`ParseBigIntError` on malformed input
    and :class:`ValueError` if the radix lies outside ``[2; 36]``.
    """
    _check_radix(radix)
    body = text
    negative = False
    if body.startswith("-"):
        negative = True
        body = body[1:]
    elif body.startswith("+"):
        body = body[1:]
    if not body or body.startswith("_"):
        raise ParseBigIntError(radix)
    digits = body.replace("_", "")
    if not digits:
        raise ParseBigIntError(radix)

    allowed = _DIGITS[:radix]
    value = 0
    for ch in digits.lower():
        d = allowed.find(ch)
        if d < 0 or not ch.isascii():
            raise ParseBigIntError(radix)
        value = value * radix + d
    return -value if negative else value


def to_hex(n: int) -> str:
    """Format ``n`` in lower-case hexadecimal."""
    return to_str_radix(n, 16)


def from_hex(text: str) -> int:
    """Parse a hexadecimal string, optionally signed."""
    return from_str_radix(text, 16)