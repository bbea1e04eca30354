"""Collision and growth analysis over ranges of inputs."""

from __future__ import annotations

import logging
from typing import Iterable

import matplotlib.pyplot as plt
import numpy as np

from .cache import PowerCache
from .config import DEFAULT_OFFSET, DEFAULT_REVERSE
from .encoder import as_non_negative_int, decimal_str, encode_many

logger = logging.getLogger(__name__)


def find_collisions(
    numbers: Iterable,
    offset=DEFAULT_OFFSET,
    reverse=DEFAULT_REVERSE,
    cache: PowerCache | None = None,
    progress: bool = False,
) -> dict[int, list[int]]:
    """Map every Goedel number shared by two or more inputs to those inputs."""
    numbers = [as_non_negative_int(n) for n in numbers]
    values = encode_many(numbers, offset, reverse, cache, progress)
    groups: dict[int, list[int]] = {}
    for n, g in zip(numbers, values):
        groups.setdefault(g, []).append(n)
    collisions = {g: ns for g, ns in groups.items() if len(ns) > 1}
    logger.debug("%d inputs, %d colliding encodings (offset=%s)", len(numbers), len(collisions), offset)
    return collisions


def digit_lengths(
    numbers: Iterable,
    offset=DEFAULT_OFFSET,
    reverse=DEFAULT_REVERSE,
    cache: PowerCache | None = None,
    progress: bool = False,
) -> np.ndarray:
    """Number of decimal digits of each encoding."""
    values = encode_many(numbers, offset, reverse, cache, progress)
    return np.array([len(decimal_str(v)) for v in values], dtype=np.int64)


def plot_growth(
    numbers: Iterable,
    offset=DEFAULT_OFFSET,
    reverse=DEFAULT_REVERSE,
    cache: PowerCache | None = None,
    output: str | None = None,
    progress: bool = False,
) -> np.ndarray:
    """Plot encoding length against input.  Returns the plotted lengths."""
    xs = [as_non_negative_int(n) for n in numbers]
    lengths = digit_lengths(xs, offset, reverse, cache, progress)

    plt.figure(figsize=(10, 5))
    plt.plot(np.asarray(xs, dtype=float), lengths, linewidth=1, color='blue')
    plt.title(f"Goedel number length vs n (offset={offset}, reverse={bool(reverse)})")
    plt.xlabel("n")
    plt.ylabel("Digits of goedel(n)")
    plt.grid(True)
    plt.tight_layout()
    if output:
        plt.savefig(output)
        plt.close()
        logger.info("Plot written to %s", output)
    else:
        plt.show()
    return lengths
