"""Goedel number encoder.

Goedel's encoding of a digit string ``X0 X1 ... Xn`` is::

    enc(X0X1...Xn) = P0**X0 * P1**X1 * ... * Pn**Xn

where ``Xk`` is the k-th decimal digit (from the left) and ``Pk`` the k-th
prime.  The encoding is not unique: a ``0`` digit contributes ``Pk**0 == 1``,
so ``goedel(23) == goedel(230) == 108``.  Two options help:

``offset``
    added to every digit before exponentiation,
    ``goedel(23, offset=1) == 648`` but ``goedel(230, offset=1) == 3240``.
``reverse``
    pairs the primes with the digits right to left,
    ``goedel(230, reverse=True) == 675`` (``2**0 * 3**3 * 5**2``).
"""

from __future__ import annotations

import math
import operator
from typing import Iterable

from tqdm import tqdm

from .cache import DEFAULT_CACHE, PowerCache
from .config import DEFAULT_OFFSET, DEFAULT_REVERSE
from .errors import InvalidArgument


def as_non_negative_int(value, name: str = "n") -> int:
    """Return ``value`` as an ``int`` or raise :class:`InvalidArgument`.

    Anything implementing ``__index__`` is accepted (numpy and sympy
    integers included).  ``bool``, floats and strings are rejected even when
    they hold an integral value.
    """
    if isinstance(value, bool):
        raise InvalidArgument(name, value)
    try:
        n = operator.index(value)
    except TypeError:
        raise InvalidArgument(name, value) from None
    if n < 0:
        raise InvalidArgument(name, value)
    return n


# 640 is the smallest limit sys.set_int_max_str_digits accepts
_CHUNK_DIGITS = 500
_CHUNK_BASE = 10 ** _CHUNK_DIGITS


def decimal_str(n: int) -> str:
    """Decimal string of ``n >= 0``, whatever the int->str limit is set to."""
    if n < _CHUNK_BASE:
        return str(n)
    chunks = []
    while n >= _CHUNK_BASE:
        n, r = divmod(n, _CHUNK_BASE)
        chunks.append(r)
    return str(n) + "".join(f"{c:0{_CHUNK_DIGITS}d}" for c in reversed(chunks))


def digits(n: int) -> list[int]:
    """Decimal digits of ``n``, most significant first."""
    return [int(ch) for ch in decimal_str(n)]


def goedel(n, offset=DEFAULT_OFFSET, reverse=DEFAULT_REVERSE, cache: PowerCache | None = None) -> int:
    """Calculate the Goedel number of ``n``."""
    n = as_non_negative_int(n, "n")
    offset = as_non_negative_int(offset, "offset")
    if cache is None:
        cache = DEFAULT_CACHE

    ds = digits(n)
    if reverse:
        ds.reverse()
    rows = cache.rows(offset, len(ds))
    return math.prod(row[d] for row, d in zip(rows, ds))


encode = goedel
enc = goedel


def encode_many(
    numbers: Iterable,
    offset=DEFAULT_OFFSET,
    reverse=DEFAULT_REVERSE,
    cache: PowerCache | None = None,
    progress: bool = False,
) -> list[int]:
    """Encode every number in ``numbers`` against one shared cache."""
    if cache is None:
        cache = DEFAULT_CACHE
    it = tqdm(numbers, desc="Encoding", unit="n") if progress else numbers
    return [goedel(n, offset, reverse, cache) for n in it]
