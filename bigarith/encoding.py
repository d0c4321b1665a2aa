"""Serialization of integers to compact bytes or human-readable hex."""

from __future__ import annotations

import binascii
from collections.abc import Iterable

from bigarith.convert import from_bytes, to_bytes


def serialize(n: int, human_readable: bool = False) -> bytes | str:
    """Encode ``n`` as its big-endian magnitude bytes.

    When ``human_readable`` is true the bytes are given as a lower-case hex
    string instead.
    """
    data = to_bytes(n)
    if human_readable:
        return data.hex()
    return data


def _decode_hex(text: str) -> bytes:
    if not text.isascii():
        raise ValueError("malformed hex encoding")
    try:
        return binascii.unhexlify(text)
    except binascii.Error as exc:
        raise ValueError("malformed hex encoding") from exc


def _collect_octets(values: Iterable[object]) -> bytes:
    octets = bytearray()
    for item in values:
        if isinstance(item, bool) or not isinstance(item, int) or not 0 <= item <= 0xFF:
            raise ValueError(f"expected a byte value, got {item!r}")
        octets.append(item)
    return bytes(octets)


def deserialize(value: bytes | bytearray | memoryview | str | Iterable[int]) -> int:
    """Decode an integer from bytes, a hex string, or a sequence of byte values."""
    if isinstance(value, (bytes, bytearray, memoryview)):
        return from_bytes(bytes(value))
    if isinstance(value, str):
        return from_bytes(_decode_hex(value))
    if isinstance(value, Iterable):
        return from_bytes(_collect_octets(value))
    raise TypeError(f"expected bigint encoding, got {type(value).__name__}")