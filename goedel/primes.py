"""Prime sequence generator.

Primes are produced one at a time from the previous one, so a caller that
keeps its own cursor never re-derives a prime it already holds.  Each prime
comes with its row of ``p**(d + offset)`` for the ten decimal digits ``d``.
"""

from __future__ import annotations

from typing import Iterator

from sympy import isprime

from .config import DIGIT_BASE


def power_row(p: int, offset: int = 0) -> tuple[int, ...]:
    """Return ``(p**offset, p**(1+offset), ..., p**(9+offset))``."""
    return tuple(p ** (d + offset) for d in range(DIGIT_BASE))


def _scan(m: int | None) -> int:
    candidate = 2 if m is None or m < 2 else m + 1
    while not isprime(candidate):
        candidate += 1
    return candidate


def next_prime(m: int | None, offset: int = 0) -> tuple[int, tuple[int, ...]]:
    """Return the first prime strictly greater than ``m`` and its power row.

    ``m=None`` starts from scratch, yielding 2.
    """
    p = _scan(m)
    return p, power_row(p, offset)


def prime_generator(start: int | None = None) -> Iterator[int]:
    """Yield primes greater than ``start`` in ascending order."""
    p = start
    while True:
        p = _scan(p)
        yield p
