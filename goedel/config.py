"""Defaults shared by the encoder and the command line."""

from __future__ import annotations

import os
import sys

DIGIT_BASE = 10
DEFAULT_OFFSET = 0
DEFAULT_REVERSE = False

# Python 3.11+ refuses to format ints longer than 4300 digits by default.
DEFAULT_INT_MAX_STR_DIGITS = 100_000_000
INT_MAX_STR_DIGITS_ENV = "GOEDEL_INT_MAX_STR_DIGITS"


def int_str_limit_setting() -> int:
    """Limit to lift to, from ``GOEDEL_INT_MAX_STR_DIGITS`` if set."""
    raw = os.environ.get(INT_MAX_STR_DIGITS_ENV)
    if raw is None:
        return DEFAULT_INT_MAX_STR_DIGITS
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{INT_MAX_STR_DIGITS_ENV} must be an integer, got {raw!r}") from None


def lift_int_str_limit(limit: int | None = None) -> None:
    """Raise Python's big-int->str limit to at least ``limit`` digits.

    Changes interpreter-wide state; only script entry points call it.
    """
    if not hasattr(sys, "set_int_max_str_digits"):
        return
    if limit is None:
        limit = int_str_limit_setting()
    current = sys.get_int_max_str_digits()
    # 0 means "no limit" already
    if current and current < limit:
        sys.set_int_max_str_digits(limit)
