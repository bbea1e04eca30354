"""Fundamental Goedel number calculator.

    >>> from goedel import goedel
    >>> goedel(9), goedel(81), goedel(230)
    (512, 768, 108)
"""

from .cache import DEFAULT_CACHE, PowerCache
from .encoder import enc, encode, encode_many, goedel
from .errors import InvalidArgument
from .primes import next_prime, prime_generator

__version__ = "0.3.0"

__all__ = [
    "DEFAULT_CACHE",
    "InvalidArgument",
    "PowerCache",
    "enc",
    "encode",
    "encode_many",
    "goedel",
    "next_prime",
    "prime_generator",
]
