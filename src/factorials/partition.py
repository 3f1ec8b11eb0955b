"""Chunking of ``[1, n]`` for the partition-parallel strategies."""

from __future__ import annotations

import math
from typing import List


def partition_range(n: int, chunk_size: int) -> List[range]:
    """Split ``[1, n]`` into ascending, contiguous chunks of ``chunk_size``.

    Every chunk holds ``chunk_size`` integers except possibly the last one.
    ``n == 0`` yields no chunks at all. Callers validate their arguments.
    """

    return [range(start, min(start + chunk_size, n + 1)) for start in range(1, n + 1, chunk_size)]


def chunk_product(chunk: range) -> int:
    return math.prod(chunk)


def combine(products: List[int]) -> int:
    """Multiply per-chunk products together in partition order."""

    total = 1
    for product in products:
        total *= product
    return total
