"""Big-integer helpers on plain ints: modular arithmetic, primes, sampling and encoding."""

__version__ = "0.1.0"