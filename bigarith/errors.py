"""Exceptions raised by big-integer parsing and conversion."""

from __future__ import annotations


class ParseBigIntError(ValueError):
    """Raised when text cannot be parsed as an integer in the given radix."""

    def __init__(self, radix: int) -> None:
        self.radix = radix
        super().__init__(f"invalid {radix}-based number representation")


class TryFromBigIntError(OverflowError):
    """Raised when an integer does not fit into a fixed-width machine type."""

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"conversion from BigInt to {type_name} overflowed")