import matplotlib

matplotlib.use("Agg")

import sys

import pytest

from goedel.cache import PowerCache


@pytest.fixture
def cache():
    """A fresh cache so tests never see each other's primes."""
    return PowerCache()


@pytest.fixture
def stock_int_str_limit():
    """Run with CPython's default int->str limit, then put the old one back."""
    if not hasattr(sys, "set_int_max_str_digits"):
        pytest.skip("no int->str limit on this interpreter")
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(4300)
    try:
        yield 4300
    finally:
        sys.set_int_max_str_digits(previous)
